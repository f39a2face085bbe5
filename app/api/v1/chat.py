from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import ChatRequestSchema, ChatResponseSchema
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.core.config import Settings
from app.wiring.dependencies import get_chat_use_case, get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ChatResponseSchema)
def chat(
    req: ChatRequestSchema,
    uc: HandleChatMessageUseCase = Depends(get_chat_use_case),
    settings: Settings = Depends(get_settings),
):
    if not req.message or not req.message.strip():
        raise HTTPException(status_code=400, detail="Missing 'message' in request body")

    conversation_id = req.conversation_id or settings.DEFAULT_CONVERSATION_ID

    try:
        reply = uc.handle(conversation_id, req.message)
    except Exception as e:
        logger.exception("Error in chat handler", extra={"conversation_id": conversation_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Internal server error")

    return ChatResponseSchema(conversation_id=conversation_id, reply=reply)
