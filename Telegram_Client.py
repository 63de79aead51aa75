"""
Outbound Telegram Bot API Calls.
Delivery Failures Are Logged And Reported Through Return Values.
"""

from typing import Optional, Union

from telegram import Bot, CallbackQuery, InlineKeyboardMarkup, LinkPreviewOptions, Message
from telegram.constants import ParseMode
from telegram.error import TelegramError

from Logging_Config import logger


def build_bot(token: str) -> Bot:
    """Create A Bot For One Request. Use It As "async with build_bot(token) as bot"."""
    return Bot(token=token)


async def send_message(bot: Bot, chat_id: Union[int, str], text: str,
                       parse_mode: Optional[str] = None,
                       disable_web_page_preview: bool = False) -> Optional[Message]:
    """
    Send A Text Message To A Chat.

    Args:
        bot: Bot To Send With
        chat_id: Target Chat ID
        text: Message Body
        parse_mode: None, "HTML" Or "MarkdownV2"
        disable_web_page_preview: Suppress Link Previews

    Returns:
        The Sent Message Or None If Delivery Failed
    """
    try:
        message = await bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            link_preview_options=LinkPreviewOptions(is_disabled=disable_web_page_preview)
        )
        logger.info(f"Message Sent To Chat {chat_id}")
        return message
    except TelegramError as e:
        logger.error(f"Failed To Send Message To Chat {chat_id}: {e}")
        return None


async def edit_note_message(bot: Bot, callback_query: CallbackQuery, text: str) -> bool:
    """
    Replace The Message Behind A Callback Button And Remove Its Keyboard.

    Inline Results Are Edited Through inline_message_id, Chat Messages
    Through Their Chat And Message IDs.

    Returns:
        bool: True If A Message Was Edited
    """
    empty_keyboard = InlineKeyboardMarkup([])
    try:
        if callback_query.inline_message_id:
            await bot.edit_message_text(
                text=text,
                inline_message_id=callback_query.inline_message_id,
                parse_mode=ParseMode.MARKDOWN_V2,
                reply_markup=empty_keyboard
            )
            return True
        if callback_query.message:
            await bot.edit_message_text(
                text=text,
                chat_id=callback_query.message.chat.id,
                message_id=callback_query.message.message_id,
                parse_mode=ParseMode.MARKDOWN_V2,
                reply_markup=empty_keyboard
            )
            return True
    except TelegramError as e:
        logger.error(f"Failed To Edit Message For Callback {callback_query.id}: {e}")
    return False


async def register_webhook(token: str, url: str, secret: Optional[str] = None) -> bool:
    """
    Point Telegram At This Service's /webhook Endpoint.

    Args:
        token: Bot Token
        url: Public Webhook URL
        secret: Value Telegram Echoes In X-Telegram-Bot-Api-Secret-Token

    Returns:
        bool: True If Telegram Accepted The Webhook
    """
    try:
        async with build_bot(token) as bot:
            result = await bot.set_webhook(
                url=url,
                secret_token=secret,
                allowed_updates=["message", "inline_query", "callback_query", "chosen_inline_result"]
            )
        logger.info(f"Telegram Webhook Registered At {url}")
        return bool(result)
    except TelegramError as e:
        logger.error(f"Failed To Register Telegram Webhook At {url}: {e}")
        return False
