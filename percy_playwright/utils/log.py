"""Console logging for the SDK.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides how the ``percy_playwright`` logger tree is printed.
"""

import logging

LOGGER_NAME = "percy_playwright"


def label(debug: bool = False) -> str:
    name = "percy:python" if debug else "percy"
    return f"[\u001b[35m{name}\u001b[39m]"


def _percy_handler(logger: logging.Logger):
    return next(
        (h for h in logger.handlers if getattr(h, "_percy_handler", False)), None
    )


def configure_logging(debug: bool = False) -> logging.Logger:
    """Prints SDK logs with the Percy label unless the application configured logging itself.

    When the root logger already has handlers, records simply propagate to them
    and the level of the ``percy_playwright`` logger is left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)

    handler = _percy_handler(logger)
    if handler is None:
        if logging.getLogger().handlers:
            return logger
        handler = logging.StreamHandler()
        handler._percy_handler = True
        logger.addHandler(handler)
        # The labelled handler is the only output; root must not print it again
        logger.propagate = False

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    handler.setFormatter(logging.Formatter(f"{label(debug)} %(message)s"))
    return logger
