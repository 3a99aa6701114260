"""POST /chat - Keyword-based help chat"""

from fastapi import APIRouter

from gameplan_gateway.api.v1.schemas import ChatRequest, ChatResponse, ErrorResponse
from gameplan_gateway.domain.chat import reply_to, FALLBACK_REPLY
from gameplan_gateway.infrastructure.observability.metrics import record_chat

router = APIRouter()


@router.post("/chat", response_model=ChatResponse, responses={400: {"model": ErrorResponse}})
def chat(request_body: ChatRequest):
    """Answer a chat message with a canned reply"""
    reply = reply_to(request_body.message)
    record_chat(reply != FALLBACK_REPLY)
    return ChatResponse(response=reply)
