# helpers.py
import logging, os
from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None) -> int:
    """
    Set the root log level from `level`, else PLAYFAIR_LOG_LEVEL (.env is
    read first), else WARNING. Unknown level names fall back to WARNING.
    Returns the numeric level applied.
    """
    load_dotenv()
    name = (level or os.environ.get("PLAYFAIR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    value = getattr(logging, name, None)
    if not isinstance(value, int):
        value = getattr(logging, DEFAULT_LOG_LEVEL)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(value)
    return value


def default_key() -> str:
    load_dotenv()
    return os.environ.get("PLAYFAIR_KEY", "")
