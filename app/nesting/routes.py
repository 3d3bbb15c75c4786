from fastapi import APIRouter, HTTPException
import logging

from .schemas import NestingRequest, NestingResponse
from .services import nest

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Nesting Sample"],
    prefix="",
    responses={422: {"description": "Malformed nesting request"}},
)

@router.post("/NEST", response_model=NestingResponse)
async def nest_sample(request: NestingRequest):
    """
    Echo the nesting input together with the nesting output
    """
    try:
        logger.info("Processing nesting request")
        return await nest(request)
    except Exception as e:
        logger.error(f"Error processing nesting request: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )
