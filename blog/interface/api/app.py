"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.application.usecase.identity import (
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)
from blog.config import Settings
from blog.interface.api.identity import IdentityCookieMiddleware
from blog.interface.api.routes import comments, health, posts
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Resolve the current user before serving, close the container after.

    Raises:
        IdentityBootstrapError: If the configured user does not exist, which
            aborts startup
    """
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)

    async with container() as request_container:
        use_case = await request_container.get(ResolveCurrentUserUseCase)
        app.state.current_user = await use_case.execute(
            ResolveCurrentUserRequest(name=settings.identity.current_user_name)
        )

    yield

    logfire.info("Shutting down")
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to serve from; defaults to the production
            container

    Returns:
        Application whose startup resolves the current user
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog Comments API",
        description="Backend API for blog posts and their comment threads",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.state.identity_cookie_name = settings.identity.cookie_name
    app_instance.add_middleware(
        IdentityCookieMiddleware, cookie_name=settings.identity.cookie_name
    )

    # Added last so it wraps everything, including cookie correction
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
