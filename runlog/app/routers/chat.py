"""HTTP front door to the chat dispatcher.

Lets any client hold the same conversation the Telegram bot offers: each POST
is one message, the response carries the bot's replies and any exported file.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends

from runlog.chat import Dispatcher
from ..dependencies import dispatcher
from ..models import ChatMessageRequest, ChatResponse, OutboundDocument

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chats", tags=["chat"])


class OutboxDocumentSender:
    """Collects exported documents so they can be returned in the response body."""

    def __init__(self) -> None:
        self.documents: list[OutboundDocument] = []

    async def send_document(self, chat_id: str, path: Path, filename: str) -> None:
        self.documents.append(
            OutboundDocument(filename=filename, content=path.read_text(encoding="utf-8"))
        )


@router.post("/{chat_id}/messages", response_model=ChatResponse)
async def post_message(
    chat_id: str,
    request: ChatMessageRequest,
    chat_dispatcher: Dispatcher = Depends(dispatcher),
) -> ChatResponse:
    """Handle one chat message and return the replies for it."""
    sender = OutboxDocumentSender()
    replies = await chat_dispatcher.handle(
        chat_id, request.text, sender, user_name=request.user_name
    )
    return ChatResponse(replies=replies, documents=sender.documents)
