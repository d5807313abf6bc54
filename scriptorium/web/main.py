from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from scriptorium.application.errors import MISSING_FIELDS_MESSAGE
from scriptorium.infra.config.logging import setup_logging
from scriptorium.web.routes import poems
from scriptorium.web.routes.poems import error_response
import structlog


def create_app() -> FastAPI:
    setup_logging()
    logger = structlog.get_logger()

    app = FastAPI(
        title="Scriptorium API",
        description="Generates medieval poems rendered as illuminated manuscripts",
        version="0.1.0"
    )

    # Routers
    app.include_router(poems.router, prefix="/api", tags=["poems"])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Тело запроса не удалось разобрать - считаем, что обязательных полей нет
        logger.info("poem_request_invalid_body", path=request.url.path, errors=len(exc.errors()))
        return error_response(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app

app = create_app()
