"""Chat endpoint — answers radiology questions with the chat model."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from radixpert.chat.relay import ChatRelay
from radixpert.errors import RadixpertError
from radixpert.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_chat_relay(request: Request) -> ChatRelay:
    return request.app.state.chat_relay


@router.post(
    "/radiology-ai-chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def radiology_ai_chat(
    req: ChatRequest,
    relay: ChatRelay = Depends(get_chat_relay),
):
    """Reply to the latest message given the prior conversation."""
    history = [turn.model_dump() for turn in req.chatHistory]
    try:
        reply = await relay.reply(req.message, history)
    except RadixpertError as e:
        logger.warning("Chat relay failed (%s): %s", e.status_code, e.message)
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    return ChatResponse(reply=reply)
