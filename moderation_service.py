"""Small Flask front for the review profanity filter.

The filter itself does no I/O; this module is one of its callers. It checks,
censors and validates review text sent as JSON, and turns a
ProfanityException into a 400 response the client can show to the user.
"""
import logging
from typing import Optional, Tuple

from flask import Flask, current_app, jsonify, request

import settings
from profanity_filter import ProfanityException, ProfanityFilter

logger = logging.getLogger(__name__)


class InvalidTextError(Exception):
    """Request body did not carry usable text."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _read_text() -> Optional[str]:
    """Pull ``text`` out of the JSON body. Missing or null text counts as clean."""
    payload = request.get_json(silent=True)
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise InvalidTextError("request body must be a JSON object")

    text = payload.get("text")
    if text is None:
        return None
    if not isinstance(text, str):
        raise InvalidTextError("text must be a string")

    max_chars = current_app.config["MAX_TEXT_CHARS"]
    if len(text) > max_chars:
        logger.info("Rejected oversized text: %d chars (limit %d)", len(text), max_chars)
        raise InvalidTextError(f"text must be at most {max_chars} characters", status_code=413)
    return text


def create_app(profanity_filter: Optional[ProfanityFilter] = None) -> Flask:
    app = Flask(__name__)
    app.config["MAX_TEXT_CHARS"] = settings.MAX_TEXT_CHARS
    pf = profanity_filter if profanity_filter is not None else ProfanityFilter(log_matches=settings.LOG_MATCHES)

    @app.route("/")
    def home():
        return "✅ Moderation service is alive!", 200

    @app.route("/moderation/check", methods=["POST"])
    def check():
        text = _read_text()
        return jsonify({
            "contains_profanity": pf.contains_profanity(text),
            "found": pf.find_profanity(text),
        })

    @app.route("/moderation/censor", methods=["POST"])
    def censor():
        text = _read_text()
        return jsonify({"text": pf.censor_profanity(text)})

    @app.route("/reviews/validate", methods=["POST"])
    def validate():
        pf.validate_text(_read_text())
        return jsonify({"valid": True})

    @app.errorhandler(ProfanityException)
    def handle_profanity(error: ProfanityException) -> Tuple[object, int]:
        logger.info("Review rejected for inappropriate language")
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(InvalidTextError)
    def handle_invalid_text(error: InvalidTextError) -> Tuple[object, int]:
        return jsonify({"error": error.message}), error.status_code

    return app


def run() -> None:
    settings.configure_logging()
    app = create_app()
    logger.info("Starting moderation service on %s:%d", settings.HOST, settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
