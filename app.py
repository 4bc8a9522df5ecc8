from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pmstore.interfaces import DocumentStore

logger = logging.getLogger(__name__)


def create_app(store: DocumentStore | None = None) -> FastAPI:
    load_dotenv("local.env")

    from endpoints.commands import router as commands_router
    from endpoints.tasks import router as tasks_router
    from pmstore.document_store import DiskDocumentStore
    from settings import get_settings

    settings = get_settings()
    if store is None:
        store = DiskDocumentStore.from_settings(settings)
    logger.info("Data directory: %s", settings.data_dir)

    app = FastAPI()
    app.state.settings = settings
    app.state.store = store

    # The desktop shell serves the front-end from its own origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(commands_router)
    app.include_router(tasks_router)

    return app


app = create_app()
