from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger.

    Called from create_app(); safe to call more than once.
    """
    logger = logging.getLogger("payroll_portal")
    logger.setLevel(level.upper())
    if not any(getattr(h, "_payroll_portal", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._payroll_portal = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
