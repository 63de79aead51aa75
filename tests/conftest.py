"""
Shared Fixtures: Test Configuration, A Mock Bot And An In-Memory Note Store.
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Config And Logging Read The Environment At Import Time
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")
os.environ.setdefault("ALLOWED_USER_IDS", "1001, 1002")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "webhookrelay-tests", "relay.log"))

import pytest
from telegram import CallbackQuery, Chat, InlineQuery, Message, User

import DataBase

OWNER_ID = 1001
STRANGER_ID = 2002


class FakeNoteStore:
    """Dictionary Backed Stand-In For DataBase.DatabaseManager."""

    def __init__(self):
        self.notes = {}
        self.healthy = True

    def check_database_connection(self):
        return self.healthy

    def put_note(self, note_id, content, telegram_id):
        if not self.healthy:
            return False
        self.notes[note_id] = {"Note_Id": note_id, "Telegram_Id": telegram_id, "Content": content}
        return True

    def get_note(self, note_id):
        note = self.notes.get(note_id)
        return note["Content"] if note else None

    def delete_note(self, note_id):
        if not self.healthy:
            return False
        self.notes.pop(note_id, None)
        return True

    def list_notes(self):
        return list(self.notes.values()) if self.healthy else []

    def search_notes(self, term):
        return [note for note in self.list_notes() if term.lower() in note["Content"].lower()]


@pytest.fixture
def note_store(monkeypatch):
    store = FakeNoteStore()
    monkeypatch.setattr(DataBase, "db_manager", store)
    return store


@pytest.fixture
def bot():
    mock_bot = AsyncMock()
    mock_bot.defaults = None
    mock_bot.send_message.return_value = MagicMock(**{"to_dict.return_value": {"message_id": 77}})
    return mock_bot


def make_user(user_id=OWNER_ID):
    return User(id=user_id, first_name="Tester", is_bot=False)


def make_message(text="/start", chat_type="private", user_id=OWNER_ID, chat_id=500):
    return Message(
        message_id=1,
        date=datetime.now(timezone.utc),
        chat=Chat(id=chat_id, type=chat_type),
        from_user=make_user(user_id),
        text=text
    )


def make_inline_query(query, user_id=OWNER_ID):
    return InlineQuery(id="iq-1", from_user=make_user(user_id), query=query, offset="")


def make_callback_query(data, user_id=OWNER_ID, inline_message_id="im-1", message=None):
    return CallbackQuery(
        id="cq-1",
        from_user=make_user(user_id),
        chat_instance="ci-1",
        data=data,
        inline_message_id=inline_message_id,
        message=message
    )


def answered_results(mock_bot):
    """Results Passed To The Last answer_inline_query Call."""
    return mock_bot.answer_inline_query.await_args.args[1]
