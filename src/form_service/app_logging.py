"""Logging configuration helpers."""

import logging

CONTEXT_FIELDS = (
    "form_identifier",
    "form_url",
    "form_path",
    "session_id",
    "transaction_id",
    "submission_id",
    "missing",
)


class ContextFormatter(logging.Formatter):
    """Formatter that appends correlation fields passed through `extra`."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{name}={getattr(record, name)}"
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        ]
        if not context:
            return message
        return f"{message} [{' '.join(context)}]"


def configure_logging() -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("form_service")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        ContextFormatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
