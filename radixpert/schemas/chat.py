"""Request/response schemas for the chat endpoint."""

from typing import Literal

from pydantic import BaseModel


class ChatTurn(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    message: str = ""
    chatHistory: list[ChatTurn] = []


class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
