from pydantic import BaseModel, Field

NESTING_PLACEHOLDER_OUTPUT = "Hello world"

class NestingRequest(BaseModel):
    """Nesting request from the client"""
    input: str = Field(..., description="Raw nesting input, accepted as-is")

class NestingResponse(BaseModel):
    """Nesting result returned to the client"""
    input: str = Field(..., description="Echo of the request input")
    output: str = Field(default=NESTING_PLACEHOLDER_OUTPUT, description="Nesting output")
