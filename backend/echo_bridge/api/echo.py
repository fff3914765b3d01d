from fastapi import APIRouter

from ..core.errors import validation_error_response
from ..schemas.echo import EchoRequest, EchoResponse
from ..schemas.error import ErrorResponse
from ..services.echo import build_echo_response
from ..services.validation import validate_echo_request

router = APIRouter(tags=["echo"])


@router.post(
    "/echo",
    response_model=EchoResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Echo a message",
)
async def echo(payload: EchoRequest):
    """
    Validate the message and echo it back with a server timestamp.

    Returns:
        EchoResponse on success, or a 400 ErrorResponse listing the violations
    """
    result = validate_echo_request(payload)
    if not result.ok:
        return validation_error_response(result.errors)
    return build_echo_response(result.value)
