import logging

from fastapi import FastAPI

from readme_elements.api.routes.health import router as health_router
from readme_elements.api.routes.widgets import router as widgets_router
from readme_elements.core.observability import configure_logging
from readme_elements.core.observability import init_sentry
from readme_elements.settings import Settings


logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with logging, Sentry and all routes."""

    app_settings = app_settings or Settings()
    configure_logging(app_settings)
    init_sentry(app_settings)

    app = FastAPI(title="readme-elements")
    app.state.settings = app_settings
    app.include_router(health_router)
    app.include_router(widgets_router)

    logger.info(
        "Starting readme-elements environment=%s palette=%s",
        app_settings.environment,
        app_settings.palette,
    )
    return app


app = create_app()
