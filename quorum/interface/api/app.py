"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from quorum.config import Settings
from quorum.interface.api.routes import auth, health, questions, topics, users
from quorum.util.di.container import create_container, setup_di
from quorum.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production
            container; tests pass one built from mocked components.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quorum API",
        description="Backend API for Quorum - ask questions, answer them and vote, organised by topics",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    # Uploaded attachments are served as static files
    app_instance.mount(
        "/uploads",
        StaticFiles(directory=settings.uploads.directory, check_dir=False),
        name="uploads",
    )

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(topics.router)
    app_instance.include_router(users.router)

    return app_instance


# App instance for uvicorn; Logfire must be configured before import
app = create_app()
