# reading_list/main.py
import logging
from typing import Optional

from fastapi import FastAPI

from .blocks import blocks_router
from .catalog import catalog_router
from .config import Settings, get_settings
from .plugin import create_platform


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="My Reading List",
        description=(
            "Book entries, their public read API and the server-side "
            "render of the reading list block."
        ),
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.platform = create_platform(settings)

    @app.get("/")
    def health_check():
        return {"status": "ok", "environment": settings.environment}

    app.include_router(catalog_router)
    app.include_router(blocks_router)
    return app


app = create_app()
