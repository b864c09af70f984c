"""
Logging configuration
Request failures are logged but generated passphrases never are
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts records that look like they carry a passphrase"""

    SENSITIVE_KEYS: Set[str] = {
        "password",
        "passphrase",
        "words",
        "secret",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    # Root logger
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


api_logger = logging.getLogger("wordpass.api")


def log_generation_rejected(category: str, message: str):
    """Log a request rejected for bad input or missing data"""
    api_logger.info(f"Generation rejected ({category}): {message}")


def log_generation_failed(error: BaseException):
    """Log an unexpected generation failure with its cause"""
    cause = error.__cause__ or error
    api_logger.error(f"Generation failed: {type(cause).__name__}: {cause}")
