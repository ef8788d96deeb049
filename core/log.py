"""Logging setup shared by the app and the UI"""
import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

REDACTED = "[REDACTED]"
SENSITIVE_FIELDS = ("password",)


def configure_logging(level="INFO"):
    """Configure the root logger once; later calls only adjust the level"""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT)
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", level)
        level = "INFO"
    root.setLevel(str(level).upper())


def redact(data: dict) -> dict:
    """Copy of data with sensitive values masked"""
    return {
        key: REDACTED if key.lower() in SENSITIVE_FIELDS else value
        for key, value in data.items()
    }
