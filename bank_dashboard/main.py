from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from bank_dashboard import __version__
from bank_dashboard.core.config import Settings, get_settings
from bank_dashboard.core.container import ApplicationContainer, build_container
from bank_dashboard.core.logging import configure_logging
from bank_dashboard.infrastructure.database import init_db
from bank_dashboard.interfaces.http import create_api_router


def create_app(
    container: Optional[ApplicationContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the dashboard application.

    When ``container`` is given it is used as is and left open on shutdown;
    otherwise one is built from ``settings`` during startup.
    """
    settings = settings or (container.settings if container else get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        if container is not None:
            app.state.container = container
            yield
            return

        built = build_container(settings)
        if settings.environment == "development" and built.engine is not None:
            await init_db(built.engine)
        app.state.container = built
        try:
            yield
        finally:
            await built.aclose()

    app = FastAPI(
        title=settings.project_name,
        description="Administrative status of the ledger and wallet platform",
        version=__version__,
        lifespan=lifespan,
    )
    # also set eagerly so clients that skip the lifespan still resolve it
    if container is not None:
        app.state.container = container

    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
