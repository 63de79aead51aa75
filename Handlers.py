"""
Telegram Update Routing For Webhook Relay.

Handlers Are Tried In Registration Order; The First One Whose can_handle
Matches Runs. Handlers That Require Auth Only Run For Allowed User IDs,
Otherwise The Update Is Dropped Without Trying Later Handlers.
"""

import base64
import binascii
import secrets
import string
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, List, Optional

from telegram import (
    Bot,
    CallbackQuery,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQuery,
    InlineQueryResultArticle,
    InputTextMessageContent,
    Message,
    Update,
)
from telegram.constants import ParseMode

import Calculator
import DataBase
import Telegram_Client
from Formatting import escape_markdown, truncate
from Logging_Config import logger

# Telegram Limits
MAX_CALLBACK_DATA_BYTES = 64
MAX_INLINE_RESULTS = 50

NOTE_ID_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class Handler:
    """A Named Route: A Predicate Plus The Coroutine That Serves It."""
    name: str
    can_handle: Callable[[Any], bool]
    handle: Callable[[Any, Bot], Awaitable[None]]
    required_auth: bool = True


class HandlerRegistry:
    """Ordered Message, Inline Query And Callback Query Handlers."""

    def __init__(self):
        self.handlers: List[Handler] = []
        self.inline_handlers: List[Handler] = []
        self.callback_handlers: List[Handler] = []

    def register(self, handler: Handler):
        self.handlers.append(handler)

    def register_inline(self, handler: Handler):
        self.inline_handlers.append(handler)

    def register_callback(self, handler: Handler):
        self.callback_handlers.append(handler)

    async def _dispatch(self, handlers: List[Handler], obj: Any, bot: Bot,
                        allowed_ids: Iterable[int]) -> Optional[str]:
        for handler in handlers:
            if not handler.can_handle(obj):
                continue

            if handler.required_auth:
                user = obj.from_user
                if user is None or user.id not in allowed_ids:
                    logger.warning(
                        f"Unauthorized User {user.id if user else 'Unknown'} For Handler {handler.name}"
                    )
                    return None

            logger.debug(f"Dispatching To Handler: {handler.name}")
            await handler.handle(obj, bot)
            return handler.name

        return None

    async def process_message(self, message: Message, bot: Bot,
                              allowed_ids: Iterable[int]) -> Optional[str]:
        """
        Run The First Matching Message Handler.

        Returns:
            Name Of The Handler That Ran, Or None
        """
        return await self._dispatch(self.handlers, message, bot, allowed_ids)

    async def process_inline_query(self, query: InlineQuery, bot: Bot,
                                   allowed_ids: Iterable[int]) -> Optional[str]:
        """Run The First Matching Inline Query Handler."""
        return await self._dispatch(self.inline_handlers, query, bot, allowed_ids)

    async def process_callback_query(self, callback_query: CallbackQuery, bot: Bot,
                                     allowed_ids: Iterable[int]) -> Optional[str]:
        """Run The First Matching Callback Query Handler."""
        return await self._dispatch(self.callback_handlers, callback_query, bot, allowed_ids)


# ---------------- Helpers ----------------
def article(result_id: str, title: str, description: str, text: str,
            parse_mode: Optional[str] = None,
            keyboard: Optional[InlineKeyboardMarkup] = None) -> InlineQueryResultArticle:
    """Build A Text Article For An Inline Query Answer."""
    return InlineQueryResultArticle(
        id=result_id,
        title=title,
        description=description,
        input_message_content=InputTextMessageContent(text, parse_mode=parse_mode),
        reply_markup=keyboard
    )


def single_button(text: str, callback_data: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[InlineKeyboardButton(text, callback_data=callback_data)]])


def new_note_id(size: int = 8) -> str:
    """Random Alphanumeric Note ID."""
    return ''.join(secrets.choice(NOTE_ID_ALPHABET) for _ in range(size))


def error_text(error: Exception, title: str = "Error occurred while processing your request") -> str:
    """MarkdownV2 Error Report Shown To The User."""
    return (
        f"❌ *{escape_markdown(title)}*\n\n"
        f"*Error:* `{escape_markdown(str(error))}`\n\n"
        f"{escape_markdown('Please try again or contact support if the problem persists.')}"
    )


# ---------------- Message Handlers ----------------
async def handle_start(message: Message, bot: Bot):
    await Telegram_Client.send_message(bot, message.chat.id, "Hello!")


start_handler = Handler(
    name="start",
    can_handle=lambda message: bool(message.text and message.text.startswith("/start")),
    handle=handle_start,
    required_auth=False
)


# ---------------- Inline Calculator ----------------
CALC_HELP = (
    "🧮 Calculator\n\n"
    "Type calc followed by a math expression:\n"
    "• calc 2+2\n"
    "• calc 10*5\n"
    "• calc (3+4)*2\n"
    "• calc 2^3\n\n"
    "Supported operators: +, -, *, /, ^, %"
)


async def handle_calculator(query: InlineQuery, bot: Bot):
    """Answer "calc <expression>" With The Evaluated Result."""
    expression = query.query.lower().replace("calc", "", 1).strip()

    if not expression:
        await bot.answer_inline_query(query.id, [article(
            "help",
            "Calculator Help",
            "Type calc followed by a math expression (e.g., calc 2+2)",
            CALC_HELP
        )])
        return

    try:
        result = Calculator.format_number(Calculator.evaluate(expression))
    except Calculator.MalformedExpressionError as e:
        logger.info(f"Rejected Calculator Expression {expression!r}: {e}")
        await bot.answer_inline_query(query.id, [article(
            "error",
            "Invalid Expression",
            "Please check your math expression",
            f"❌ Calculator Error\nInvalid expression: {expression}\n\n"
            "Supported: numbers, +, -, *, /, ^, %, (, )"
        )])
        return

    await bot.answer_inline_query(query.id, [article(
        "result",
        f"{expression} = {result}",
        f"Result: {result}",
        f"🧮 Calculator\n{expression} = {result}"
    )])


inline_calculator_handler = Handler(
    name="inline-calculator",
    can_handle=lambda query: query.query.lower().startswith("calc"),
    handle=handle_calculator,
    required_auth=False
)


# ---------------- Inline Notes ----------------
NOTE_CREATE_PREFIX = "note create"
NOTE_GET_PREFIX = "note get"


async def handle_note_create(query: InlineQuery, bot: Bot):
    """Preview A New Note With A Button That Stores It."""
    content = query.query[len(NOTE_CREATE_PREFIX):].strip()

    if not content:
        await bot.answer_inline_query(query.id, [article(
            "result",
            "📝 Create Note",
            'Please provide note content after "note create"',
            escape_markdown('❌ Please provide note content after "note create"'),
            parse_mode=ParseMode.MARKDOWN_V2
        )])
        return

    encoded = base64.b64encode(content.encode('utf-8')).decode('ascii')
    callback_data = f"create_note:{query.from_user.id}:{encoded}"

    if len(callback_data.encode('utf-8')) > MAX_CALLBACK_DATA_BYTES:
        await bot.answer_inline_query(query.id, [article(
            "too-long",
            "📝 Note Too Long",
            "Inline notes must be short, please shorten the text",
            escape_markdown("❌ This note is too long to be created inline."),
            parse_mode=ParseMode.MARKDOWN_V2
        )])
        return

    await bot.answer_inline_query(query.id, [article(
        "create-note",
        "📝 Create New Note",
        f"Click to create note: {truncate(content)}",
        f"📝 *Note Preview*\n\n📄 Content:\n{escape_markdown(content)}\n\n"
        "⏳ Click the button below to create this note\\.",
        parse_mode=ParseMode.MARKDOWN_V2,
        keyboard=single_button("✅ Create Note", callback_data)
    )])


async def handle_note_get(query: InlineQuery, bot: Bot):
    """List Stored Notes Containing A Search Term."""
    term = query.query[len(NOTE_GET_PREFIX):].strip().lower()

    if not term:
        await bot.answer_inline_query(query.id, [article(
            "result",
            "🔍 Search Notes",
            'Type "note get <search term>" to find notes',
            escape_markdown('🔍 Type "note get <search term>" to search for your notes'),
            parse_mode=ParseMode.MARKDOWN_V2
        )])
        return

    results = []
    for note in DataBase.db_manager.search_notes(term)[:MAX_INLINE_RESULTS]:
        note_id = note['Note_Id']
        content = note['Content']
        results.append(article(
            note_id,
            f"📝 {truncate(content)}",
            f"ID: {note_id}",
            f"📝 *Note Found\\!*\n\n📋 ID: `{escape_markdown(note_id)}`\n📄 Content:\n{escape_markdown(content)}",
            parse_mode=ParseMode.MARKDOWN_V2,
            keyboard=single_button("🗑️ Delete Note", f"delete_note:{query.from_user.id}:{note_id}")
        ))

    if not results:
        results.append(article(
            "no-results",
            "🔍 No Notes Found",
            f'No notes found matching "{term}"',
            f'🔍 No notes found matching "{escape_markdown(term)}"',
            parse_mode=ParseMode.MARKDOWN_V2
        ))

    await bot.answer_inline_query(query.id, results)


inline_notes_set_handler = Handler(
    name="inline-notes-set",
    can_handle=lambda query: query.query.lower().startswith(NOTE_CREATE_PREFIX),
    handle=handle_note_create
)

inline_notes_get_handler = Handler(
    name="inline-notes-get",
    can_handle=lambda query: query.query.lower().startswith(NOTE_GET_PREFIX),
    handle=handle_note_get
)


# ---------------- Default Inline ----------------
INLINE_HELP = (
    "🤖 *Webhook Relay Bot Help*\n\n"
    "This bot supports inline queries.\n\n"
    "Type the bot's username followed by a command to use features.\n\n"
    "Available commands:\n"
    "- note create <text> / note get <term>: Take and search notes\n"
    "- calc <expression>: Inline calculator\n\n"
    "For more info, type /start in chat."
)


async def handle_default_inline(query: InlineQuery, bot: Bot):
    await bot.answer_inline_query(query.id, [article(
        "help",
        "Help",
        "How to use this bot",
        INLINE_HELP,
        parse_mode=ParseMode.MARKDOWN
    )])


default_inline_handler = Handler(
    name="default-inline",
    can_handle=lambda query: True,
    handle=handle_default_inline,
    required_auth=False
)


# ---------------- Note Callbacks ----------------
async def report_note_failure(bot: Bot, callback_query: CallbackQuery, action: str,
                              title: str, error: Exception):
    """Tell The User A Note Operation Failed, In The Popup And In The Chat."""
    await bot.answer_callback_query(callback_query.id, text=f"❌ Failed to {action} note: {error}")
    if callback_query.message:
        await Telegram_Client.send_message(
            bot,
            callback_query.message.chat.id,
            error_text(error, title),
            parse_mode=ParseMode.MARKDOWN_V2
        )


async def handle_note_create_callback(callback_query: CallbackQuery, bot: Bot):
    """Store The Note Carried In create_note:<user_id>:<base64 content>."""
    _, user_id, encoded = callback_query.data.split(":", 2)

    if user_id != str(callback_query.from_user.id):
        await bot.answer_callback_query(callback_query.id, text="❌ You can only create notes for yourself!")
        return

    try:
        content = base64.b64decode(encoded, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.warning(f"Undecodable Note Payload From User {user_id}: {e}")
        await report_note_failure(bot, callback_query, "create", "Note Creation Error", e)
        return

    note_id = new_note_id()
    if not DataBase.db_manager.put_note(note_id, content, callback_query.from_user.id):
        await report_note_failure(bot, callback_query, "create", "Note Creation Error",
                                  RuntimeError("note storage is unavailable"))
        return

    await bot.answer_callback_query(callback_query.id, text="✅ Note created successfully!")
    await Telegram_Client.edit_note_message(
        bot,
        callback_query,
        f"✅ *Note Created\\!*\n\n📋 ID: `{escape_markdown(note_id)}`\n📄 Content:\n{escape_markdown(content)}"
    )


async def handle_note_delete_callback(callback_query: CallbackQuery, bot: Bot):
    """Delete The Note Named In delete_note:<user_id>:<note_id>."""
    _, user_id, note_id = callback_query.data.split(":", 2)

    if user_id != str(callback_query.from_user.id):
        await bot.answer_callback_query(callback_query.id, text="❌ You can only delete your own notes!")
        return

    if not DataBase.db_manager.delete_note(note_id):
        await report_note_failure(bot, callback_query, "delete", f"Note Delete Error ({note_id})",
                                  RuntimeError("note storage is unavailable"))
        return

    await bot.answer_callback_query(callback_query.id, text="✅ Note deleted successfully!")
    await Telegram_Client.edit_note_message(
        bot,
        callback_query,
        f"🗑️ *Note Deleted\\!*\n\n📋 ID: `{escape_markdown(note_id)}`\n"
        "✅ This note has been permanently deleted\\."
    )


callback_notes_create_handler = Handler(
    name="callback-notes-create",
    can_handle=lambda callback_query: bool(callback_query.data and callback_query.data.startswith("create_note:")),
    handle=handle_note_create_callback
)

callback_notes_delete_handler = Handler(
    name="callback-notes-delete",
    can_handle=lambda callback_query: bool(callback_query.data and callback_query.data.startswith("delete_note:")),
    handle=handle_note_delete_callback
)


def build_registry() -> HandlerRegistry:
    """Registry With Every Bot Feature, Catch-All Inline Help Last."""
    registry = HandlerRegistry()

    registry.register(start_handler)

    registry.register_inline(inline_calculator_handler)
    registry.register_inline(inline_notes_set_handler)
    registry.register_inline(inline_notes_get_handler)
    registry.register_inline(default_inline_handler)

    registry.register_callback(callback_notes_create_handler)
    registry.register_callback(callback_notes_delete_handler)

    return registry


# ---------------- Update Processing ----------------
async def process_update(update: Update, bot: Bot, registry: HandlerRegistry,
                         allowed_ids: Iterable[int]):
    """
    Route One Telegram Update, Reporting Handler Errors Back To The User.

    Messages Outside Private Chats Are Ignored.
    """
    if update.message:
        message = update.message
        if message.chat.type == "private":
            try:
                await registry.process_message(message, bot, allowed_ids)
            except Exception as e:
                logger.error(f"Message Handler Error: {e}", exc_info=True)
                await Telegram_Client.send_message(
                    bot,
                    message.chat.id,
                    error_text(e, "Error occurred while processing your message"),
                    parse_mode=ParseMode.MARKDOWN_V2
                )
        else:
            logger.debug(f"Ignored Message From {message.chat.type} Chat {message.chat.id}")

    if update.inline_query:
        query = update.inline_query
        try:
            await registry.process_inline_query(query, bot, allowed_ids)
        except Exception as e:
            logger.error(f"Inline Query Handler Error: {e}", exc_info=True)
            await bot.answer_inline_query(query.id, [article(
                "error",
                "❌ Error occurred",
                "An error occurred while processing your request",
                error_text(e),
                parse_mode=ParseMode.MARKDOWN_V2
            )])

    if update.callback_query:
        callback_query = update.callback_query
        try:
            await registry.process_callback_query(callback_query, bot, allowed_ids)
        except Exception as e:
            logger.error(f"Callback Query Handler Error: {e}", exc_info=True)
            await bot.answer_callback_query(callback_query.id, text=f"❌ Error: {e}")
            if callback_query.message:
                await Telegram_Client.send_message(
                    bot,
                    callback_query.message.chat.id,
                    error_text(e),
                    parse_mode=ParseMode.MARKDOWN_V2
                )

    if update.chosen_inline_result:
        chosen = update.chosen_inline_result
        logger.info(f"Chosen Inline Result {chosen.result_id} By User {chosen.from_user.id}")
