"""
Logging that hides client phone numbers
"""
import logging
import re
from typing import Optional


class SecureFormatter(logging.Formatter):
    """Formatter that masks client phone numbers"""

    SECRET_PATTERNS = [
        # 052-1234567 -> 052-*****67
        (re.compile(r'\b(05\d)-?\d{5}(\d{2})\b'), r'\1-*****\2'),
        # +972 52-123-4567 and similar international forms
        (re.compile(r'\+972[\s-]?(5\d)[\s-]?\d{3}[\s-]?\d{2}(\d{2})\b'), r'+972-\1-*****\2'),
    ]

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        for pattern, replacement in self.SECRET_PATTERNS:
            formatted = pattern.sub(replacement, formatted)

        return formatted


def setup_secure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configures root logging with phone masking"""
    formatter = SecureFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("dateutil").setLevel(logging.WARNING)
