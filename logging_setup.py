import logging

import settings

# -----------------------------
# Logger configuration
# -----------------------------
logger = logging.getLogger("learning_fastapi")


class RequestIDFilter(logging.Filter):
    """Make sure every record carries a request_id so the formatter never fails."""

    def filter(self, record):
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


# Helper to attach request_id to log records
class RequestIDAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        request_id = self.extra.get("request_id")
        return msg, {**kwargs, "extra": {"request_id": request_id}}


def configure_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(request_id)s | %(message)s"))
        handler.addFilter(RequestIDFilter())
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_request_logger(request_id: str) -> RequestIDAdapter:
    return RequestIDAdapter(logger, {"request_id": request_id})
