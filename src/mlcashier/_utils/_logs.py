import logging
import sys

LOGGER_NAME = "mlcashier"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once: a single stream handler is attached to the
    ``mlcashier`` logger and only its level changes on later calls.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(getattr(h, "_mlcashier", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._mlcashier = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger
