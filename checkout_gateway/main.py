"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from checkout_gateway.api.middleware import RequestIDMiddleware
from checkout_gateway.api.routes import payments as payments_routes
from checkout_gateway.core.config import settings
from checkout_gateway.core.exceptions import register_exception_handlers
from checkout_gateway.core.logging_config import configure_logging, get_logger
from checkout_gateway.core.response import success_response


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("application_startup", project=settings.PROJECT_NAME, environment=settings.ENVIRONMENT)
    yield
    logger.info("application_shutdown")


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    app.include_router(payments_routes.router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return success_response(data={"status": "ok"})

    return app


app = create_app()
