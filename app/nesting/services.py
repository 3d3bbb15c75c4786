import logging

from .schemas import NestingRequest, NestingResponse, NESTING_PLACEHOLDER_OUTPUT

logger = logging.getLogger(__name__)

async def nest(request: NestingRequest) -> NestingResponse:
    """
    Business logic for the nesting endpoint.

    Returns the placeholder output until a real nesting engine is wired in.
    """
    logger.debug(f"Nesting input of length {len(request.input)}")
    return NestingResponse(input=request.input, output=NESTING_PLACEHOLDER_OUTPUT)
