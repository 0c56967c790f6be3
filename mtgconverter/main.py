from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mtgconverter.api import (
    files_router,
    health_router,
    options_router,
    output_router,
    session_router,
)
from mtgconverter.config import settings
from mtgconverter.db.database import async_session_factory, close_db, init_db
from mtgconverter.db.storage import DatabaseStorage
from mtgconverter.services.session_store import SessionStore
from mtgconverter.services.workspace import ConverterWorkspace


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()

    session_store = SessionStore(
        DatabaseStorage(async_session_factory),
        key=settings.session_storage_key,
        version=settings.session_schema_version,
    )
    workspace = ConverterWorkspace(session_store)
    await workspace.start()
    app.state.workspace = workspace
    yield
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("mtgconverter"),
    lifespan=lifespan,
)

app.include_router(files_router)
app.include_router(health_router)
app.include_router(options_router)
app.include_router(output_router)
app.include_router(session_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
