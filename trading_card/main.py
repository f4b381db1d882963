from fastapi import FastAPI

from trading_card.api.routes.cards import router
from trading_card.core.observability import configure_logging
from trading_card.core.observability import init_sentry
from trading_card.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with logging and Sentry configured."""

    settings = Settings()
    configure_logging(settings)
    init_sentry(settings)

    application = FastAPI(title="GitHub Trading Card")
    application.include_router(router)
    return application


app = create_app()
