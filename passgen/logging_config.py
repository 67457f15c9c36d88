"""
Logging configuration
Generation events are logged but never include generated values
"""

import logging
import sys
from typing import Set


class SecurityFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "password",
        "passphrase",
        "secret",
        "token",
        "words",
        "value",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        # Ensure we never log sensitive data
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if f"{key}=" in msg:
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
    handler.addFilter(SecurityFilter())

    # Root logger
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Generation event logger
generator_logger = logging.getLogger("passgen.generator")

# Request protection logger
security_logger = logging.getLogger("passgen.security")


def log_password_generated(length: int, charset_size: int):
    """Log password generation (no generated value)"""
    generator_logger.info(f"Password generated: length {length}, charset size {charset_size}")


def log_passphrase_generated(word_count: int, list_size: int):
    """Log passphrase generation (no generated value)"""
    generator_logger.info(f"Passphrase generated: {word_count} words from {list_size}")


def log_strength_checked(length: int):
    """Log a strength check (no password content)"""
    generator_logger.info(f"Strength check performed on {length} characters")


def log_invalid_request(reason: str):
    """Log a rejected generation request"""
    generator_logger.warning(f"Generation rejected: {reason}")


def log_rate_limited(ip: str):
    """Log rate limit event"""
    security_logger.warning(f"Rate limit exceeded for {ip}")
