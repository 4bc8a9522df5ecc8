from __future__ import annotations

import logging

from fastapi import HTTPException, Request

from pmstore.errors import DocumentParseError, StoreError
from pmstore.paths import check_logical_name
from pmstore.repositories import AsyncDocumentStore, AsyncTaskRepository
from pmstore.task_repository import TaskRepository

logger = logging.getLogger(__name__)


def get_store(request: Request) -> AsyncDocumentStore:
    return AsyncDocumentStore(request.app.state.store)


def get_task_repo(request: Request) -> AsyncTaskRepository:
    repo = TaskRepository(request.app.state.store, request.app.state.settings.tasks_document)
    return AsyncTaskRepository(repo)


def log_command(request: Request, command: str, *args: object) -> None:
    if request.app.state.settings.debug_log_requests:
        logger.info("COMMAND %s %s", command, " ".join(repr(a) for a in args))


def checked_name(rel_path: str) -> str:
    try:
        return check_logical_name(rel_path)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def http_error(err: StoreError) -> HTTPException:
    """Map a store failure to an HTTP error whose detail is the error message."""
    if isinstance(err, DocumentParseError):
        return HTTPException(status_code=422, detail=str(err))
    return HTTPException(status_code=500, detail=str(err))
