# Utility functions shared by the event mapping modules
import json
import logging
import sys

from .errors import MalformedContextError


class StructuredLogFormatter(logging.Formatter):
    """Formats a record as a single-line JSON object understood by Cloud Logging."""

    def format(self, record):
        # ensure_ascii=False keeps non-ASCII text as-is; json never escapes "/"
        return json.dumps(
            {"message": record.getMessage(), "severity": record.levelname},
            ensure_ascii=False,
        )


def get_structured_logger(name):
    """Return a logger that writes structured JSON lines to stderr.

    The logger does not propagate to the root logger, so each record is written
    exactly once no matter how the hosting process configures logging.
    """
    logger = logging.getLogger(name)
    if not any(getattr(h, "_structured_stderr", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredLogFormatter())
        handler._structured_stderr = True
        logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = False
    return logger


def require_mapping(value, field_name):
    """Return value if it is a JSON object, otherwise raise MalformedContextError."""
    if not isinstance(value, dict):
        raise MalformedContextError(f"Expected a JSON object for field: {field_name}", field_name)
    return value


def require_str(obj, key, field_name=None):
    """Return obj[key] as a non-empty string, otherwise raise MalformedContextError."""
    field_name = field_name or key
    value = obj.get(key)
    if value is None:
        raise MalformedContextError(f"Missing required field: {field_name}", field_name)
    if not isinstance(value, str) or not value:
        raise MalformedContextError(f"Field must be a non-empty string: {field_name}", field_name)
    return value


def optional_str(obj, key, field_name=None):
    """Return obj[key] when it is a string, None when absent or null."""
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        field_name = field_name or key
        raise MalformedContextError(f"Field must be a string: {field_name}", field_name)
    return value
