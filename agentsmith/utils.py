import json
import logging
from datetime import UTC, datetime
from typing import Any

DATE_FORMAT = "%b %d, %Y"


def get_date(now: datetime | None = None) -> str:
    """Local date formatted like 'Oct 19, 2026'"""
    now = now or datetime.now().astimezone()
    return now.strftime(DATE_FORMAT)


def default_prompt(now: datetime | None = None) -> str:
    """Built-in persona used when no system prompt is configured"""
    return (
        "You are a helpful assistant. Please generate truthful, accurate, and honest "
        "responses while also keeping your answers succinct and to-the-point. "
        f"Today's date is: {get_date(now)}"
    )


def greeting(now: datetime | None = None) -> str:
    return f"Hello, user! Today is {get_date(now)}. Enjoy your day!"


def setup_logging(level: str = "WARNING", json_format: bool = False) -> None:
    """Configure root logging on stderr, as JSON lines or plain text"""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_format:
        class JSONFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                log_obj: dict[str, Any] = {
                    "timestamp": datetime.now(UTC).isoformat(),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                if record.exc_info:
                    log_obj["exception"] = self.formatException(record.exc_info)
                return json.dumps(log_obj)

        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.root.handlers = []
    logging.root.addHandler(handler)
    logging.root.setLevel(log_level)
