"""
Webhook Relay - Forwards GitHub Events And Serves Telegram Bot Updates.
Flask Endpoints For Telegram And GitHub Webhooks With Error Handling And Logging.
"""

import asyncio
import hmac
import hashlib
import re
import sys
import time
from datetime import datetime, timezone
from typing import Union

from flask import Flask, request, jsonify
from telegram import Update
from telegram.constants import ParseMode

import Config
import DataBase
import GitHub_Events
import Handlers
import Telegram_Client
from Logging_Config import logger

# ---------------- Globals ----------------
App = Flask(__name__)
Registry = Handlers.build_registry()

CHAT_ID_PATTERN = re.compile(r"^-?\d+$")


# ---------------- Helper Functions ----------------
def verify_webhook_signature(payload: bytes, signature: str, secret: str) -> bool:
    """
    Verify GitHub Webhook Signature.

    Args:
        payload: Raw Request Payload
        signature: X-Hub-Signature-256 Header
        secret: Webhook Secret

    Returns:
        bool: True If Signature Is Valid
    """
    if not secret or not signature:
        return False

    expected_signature = hmac.new(
        secret.encode(),
        payload,
        hashlib.sha256
    ).hexdigest()
    expected_signature = f"sha256={expected_signature}"

    return hmac.compare_digest(expected_signature, signature)


def parse_chat_id(raw: str) -> Union[int, str]:
    """Numeric Chat IDs Become int, "@channel" Style IDs Stay Text."""
    return int(raw) if CHAT_ID_PATTERN.match(raw) else raw


def error_response(error: Exception, status: int = 500):
    return jsonify({
        "ok": False,
        "error": str(error),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }), status


# ---------------- Async Workers ----------------
async def handle_telegram_update(data: dict):
    """Parse A Telegram Update And Route It Through The Handler Registry."""
    async with Telegram_Client.build_bot(Config.config.telegram.token) as bot:
        update = Update.de_json(data, bot)
        await Handlers.process_update(update, bot, Registry, Config.config.telegram.allowed_user_ids)


async def relay_github_event(bot_token: str, chat_id: Union[int, str], event: str, payload: dict) -> dict:
    """
    Render A GitHub Event And Send It To A Chat.

    Returns:
        {"telegramResponse": ..., "message": ...} When A Message Was Delivered, Else {}
    """
    message = GitHub_Events.render_event(event, payload)
    if message is None:
        return {}

    async with Telegram_Client.build_bot(bot_token) as bot:
        response = await Telegram_Client.send_message(
            bot,
            chat_id,
            message,
            parse_mode=ParseMode.HTML,
            disable_web_page_preview=True
        )

    if response is None:
        return {}
    return {"telegramResponse": response.to_dict(), "message": message}


# ---------------- Flask Routes ----------------
@App.route("/")
def Home():
    return "OK"


@App.route("/health")
def Health():
    """Health Check Endpoint For Monitoring."""
    try:
        if not DataBase.db_manager.check_database_connection():
            return jsonify({"status": "unhealthy", "database": "disconnected"}), 503

        return jsonify({
            "status": "healthy",
            "database": "connected",
            "timestamp": time.time()
        }), 200
    except Exception as e:
        logger.error(f"Health Check Failed: {e}")
        return jsonify({"status": "unhealthy", "error": str(e)}), 503


@App.route("/webhook", methods=["POST"])
def Webhook():
    """Handle Telegram Updates With Secret Token Verification."""
    try:
        secret = Config.config.telegram.webhook_secret
        if secret and request.headers.get("X-Telegram-Bot-Api-Secret-Token") != secret:
            logger.warning("Invalid Telegram Secret Token Received")
            return jsonify({"error": "Unauthorized"}), 401

        data = request.get_json(silent=True)
        if not data:
            logger.warning("Empty Or Invalid Telegram Update Received")
            return jsonify({"ok": False, "error": "Invalid JSON"}), 400

        logger.debug(f"Received Telegram Update {data.get('update_id')}")
        asyncio.run(handle_telegram_update(data))
        return jsonify({"ok": True}), 200

    except Exception as e:
        logger.error(f"Telegram Webhook Processing Error: {e}", exc_info=True)
        return error_response(e)


@App.route("/github/<bot_token>/<chat_id>", methods=["POST"])
def GitHubWebhook(bot_token: str, chat_id: str):
    """Relay A GitHub Webhook Delivery To A Telegram Chat."""
    try:
        payload = request.get_data()
        event_type = request.headers.get("X-GitHub-Event", "")

        logger.info(f"Received GitHub Event: {event_type} For Chat {chat_id}")

        # Verify Webhook Signature If Secret Is Configured
        secret = Config.config.github.webhook_secret
        if secret and not verify_webhook_signature(payload, request.headers.get("X-Hub-Signature-256"), secret):
            logger.warning("Invalid GitHub Webhook Signature Received")
            return jsonify({"error": "Invalid Signature"}), 401

        data = request.get_json(silent=True)
        if not data:
            logger.warning("Empty Or Invalid GitHub Payload Received")
            return jsonify({"ok": False, "error": "Invalid JSON"}), 400

        additionals = asyncio.run(relay_github_event(bot_token, parse_chat_id(chat_id), event_type, data))
        return jsonify({"ok": True, "event": event_type, "additionals": additionals}), 200

    except Exception as e:
        logger.error(f"GitHub Webhook Processing Error: {e}", exc_info=True)
        return error_response(e)


@App.errorhandler(404)
def NotFound(error):
    return f"{request.method} - {request.path} not found (404)", 404


# ---------------- Main ----------------
def RunFlask():
    """Run Flask Server With Production Configuration."""
    try:
        logger.info(f"Starting Flask Server On {Config.config.server.host}:{Config.config.server.port}")
        App.run(
            host=Config.config.server.host,
            port=Config.config.server.port,
            debug=Config.config.server.debug,
            threaded=True
        )
    except Exception as e:
        logger.critical(f"Flask Server Error: {e}")
        raise


def main():
    try:
        logger.info("Starting Webhook Relay...")

        if not DataBase.db_manager.init_database():
            logger.error("Failed To Initialize Database")
            sys.exit(1)
        logger.info("Database Initialized Successfully")

        webhook_url = Config.config.server.webhook_url
        if webhook_url:
            asyncio.run(Telegram_Client.register_webhook(
                Config.config.telegram.token,
                f"{webhook_url.rstrip('/')}/webhook",
                Config.config.telegram.webhook_secret
            ))

        RunFlask()

    except KeyboardInterrupt:
        logger.info("Relay Stopped By User")
    except Exception as e:
        logger.critical(f"Failed To Start Relay: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
