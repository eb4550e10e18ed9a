"""Telegram transport for the chat dispatcher (python-telegram-bot)."""

import logging
from pathlib import Path

from telegram import Bot, Message, ReplyKeyboardMarkup, ReplyKeyboardRemove, Update
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from runlog.chat import Dispatcher, Reply

logger = logging.getLogger(__name__)


class TelegramDocumentSender:
    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    async def send_document(self, chat_id: str, path: Path, filename: str) -> None:
        with path.open("rb") as document:
            await self._bot.send_document(
                chat_id=chat_id, document=document, filename=filename
            )


def reply_markup(reply: Reply) -> ReplyKeyboardMarkup | ReplyKeyboardRemove | None:
    if reply.keyboard:
        return ReplyKeyboardMarkup(
            reply.keyboard,
            resize_keyboard=True,
            one_time_keyboard=reply.one_time_keyboard,
        )
    if reply.remove_keyboard:
        return ReplyKeyboardRemove()
    return None


async def send_reply(message: Message, reply: Reply) -> None:
    """Send a reply as Markdown, falling back to plain text if Telegram rejects it.

    User notes are echoed back verbatim and can contain stray `*` or `_`.
    """
    markup = reply_markup(reply)
    try:
        await message.reply_text(
            reply.text, parse_mode=ParseMode.MARKDOWN, reply_markup=markup
        )
    except BadRequest as e:
        logger.warning(f"Telegram rejected Markdown reply, resending as plain text: {e}")
        await message.reply_text(reply.text, reply_markup=markup)


class RunlogBot:
    def __init__(self, token: str, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
        self.app = Application.builder().token(token).build()
        # Commands are text too; the dispatcher tells them apart. Edited messages
        # are not new input and never reach the dispatcher.
        self.app.add_handler(
            MessageHandler(filters.TEXT & filters.UpdateType.MESSAGE, self.on_text)
        )

    async def on_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        chat = update.effective_chat
        if message is None or chat is None or message.text is None:
            return

        user = update.effective_user
        replies = await self._dispatcher.handle(
            str(chat.id),
            message.text,
            TelegramDocumentSender(context.bot),
            user_name=user.first_name if user else None,
        )
        for reply in replies:
            await send_reply(message, reply)

    def run(self) -> None:
        """Poll Telegram until interrupted (SIGINT/SIGTERM stop the loop)."""
        self.app.run_polling(allowed_updates=Update.ALL_TYPES)
