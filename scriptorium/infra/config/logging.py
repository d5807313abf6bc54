import logging
import sys
import structlog
from pythonjsonlogger.json import JsonFormatter

from scriptorium.infra.config.settings import settings

HANDLER_NAME = "scriptorium"


def setup_logging(level: str | None = None):
    """
    Настраивает структурное логирование (JSON) для приложения.
    """
    log_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # Конфигурация structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Конфигурация стандартного logging (для перехвата логов библиотек)
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Повторный вызов (например, несколько create_app в тестах) заменяет наш хендлер
    root_logger.handlers = [h for h in root_logger.handlers if h.get_name() != HANDLER_NAME]
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Перехват логов uvicorn
    logging.getLogger("uvicorn.access").handlers = [handler]
    logging.getLogger("uvicorn.error").handlers = [handler]
