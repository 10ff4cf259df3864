"""
Flask webhook endpoint.

Parses Telegram deliveries and hands them to the dispatch queue. No business
logic runs on the request thread.
"""
import hmac
import logging
import queue
from typing import Optional

from flask import Flask, abort, request
from telebot import types

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def create_webhook_app(
    updates: "queue.Queue[Optional[types.Update]]",
    path: str = "/bot",
    secret_token: Optional[str] = None,
) -> Flask:
    """
    Build the Flask app exposing the single webhook path.

    :param updates: Queue consumed by the dispatch loop
    :param path: URL path Telegram posts to
    :param secret_token: If set, deliveries must carry the matching secret header
    :return: Flask application
    """
    app = Flask(__name__)

    @app.route(path, methods=["POST"])
    def receive_update():
        if secret_token:
            supplied = request.headers.get(SECRET_TOKEN_HEADER, "")
            if not hmac.compare_digest(supplied.encode("utf-8"), secret_token.encode("utf-8")):
                logger.warning("Rejected webhook delivery with invalid secret token")
                abort(403)

        if not request.is_json:
            abort(400)

        try:
            update = types.Update.de_json(request.get_data(as_text=True))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Rejected malformed webhook delivery: {e}")
            abort(400)

        updates.put(update)
        return ""

    return app
