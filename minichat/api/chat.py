"""Chat proxy endpoint.

Receives the full conversation, forwards it to the completion service and
returns the single reply message.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from minichat.models.schemas import ChatReply, ChatRequest, ErrorResponse
from minichat.proxy.upstream import CompletionService, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

GENERIC_FAILURE = "Failed to fetch response"


def get_completion_service(request: Request) -> CompletionService:
    """Return the completion service built at application startup."""
    return request.app.state.completion_service


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def chat(
    payload: ChatRequest,
    service: CompletionService = Depends(get_completion_service),
) -> ChatReply | JSONResponse:
    """Exchange the conversation for one assistant reply.

    Args:
        payload: The conversation so far.
        service: Completion service injected from application state.

    Returns:
        ChatReply on success, or a 500 with a generic error body.
    """
    try:
        reply = await service.complete(payload.messages)
    except UpstreamError as e:
        logger.error(f"Upstream completion failed: {e}")
        return _failure_response()
    except Exception:
        logger.exception("Unexpected error while proxying chat completion")
        return _failure_response()

    logger.info(f"Answered conversation of {len(payload.messages)} messages")
    return ChatReply(reply=reply)


def _failure_response() -> JSONResponse:
    # Upstream details stay in the server log.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=GENERIC_FAILURE).model_dump(),
    )


async def chat_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed chat requests with the generic failure body.

    Chat clients rely on a single failure shape, so bad JSON, a missing
    ``messages`` field or an unknown role are reported like any other failed
    exchange. Other routes keep FastAPI's default 422.
    """
    if not request.url.path.startswith(router.prefix):
        return await request_validation_exception_handler(request, exc)

    logger.warning(f"Rejected malformed chat request: {exc.errors()}")
    return _failure_response()
