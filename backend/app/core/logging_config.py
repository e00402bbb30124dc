"""
Logging setup for the console
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    if not _configured:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
        # httpx logs every request at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
        _configured = True
    else:
        logging.getLogger().setLevel(numeric_level)
