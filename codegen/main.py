from contextlib import asynccontextmanager

from fastapi import FastAPI

from codegen.api import generators, health, snippets
from codegen.core.config import get_settings
from codegen.core.logging import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    with configure_logging():
        yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(generators.router)
    app.include_router(snippets.router)
    return app


app = create_app()
