import os

DEFAULT_CHARSET = "utf-8"
DEFAULT_MAX_LINE_LENGTH = 78
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_charset() -> str:
    return os.environ.get("MIMEHEADERS_DEFAULT_CHARSET") or DEFAULT_CHARSET


def get_max_line_length() -> int:
    raw = os.environ.get("MIMEHEADERS_MAX_LINE_LENGTH")
    if not raw:
        return DEFAULT_MAX_LINE_LENGTH
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"MIMEHEADERS_MAX_LINE_LENGTH must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"MIMEHEADERS_MAX_LINE_LENGTH must be positive, got {value}")
    return value


def get_log_level() -> str:
    return (os.environ.get("MIMEHEADERS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
