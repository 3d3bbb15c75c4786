import asyncio

from app.nesting.schemas import NestingRequest, NestingResponse
from app.nesting.services import nest


def test_nest_returns_response_model():
    result = asyncio.run(nest(NestingRequest(input="test data")))

    assert isinstance(result, NestingResponse)
    assert result.input == "test data"
    assert result.output == "Hello world"


def test_nest_does_not_modify_request():
    request = NestingRequest(input="  padded  ")

    result = asyncio.run(nest(request))

    assert request.input == "  padded  "
    assert result.input == "  padded  "


def test_response_defaults_to_placeholder_output():
    assert NestingResponse(input="x").output == "Hello world"
