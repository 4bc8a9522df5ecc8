from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from pmstore.errors import StoreError
from pmstore.repositories import AsyncDocumentStore

from .deps import checked_name, get_store, http_error, log_command

router = APIRouter(prefix="/api", tags=["commands"])


@router.get("/data-dir")
async def data_dir(request: Request):
    return {"data_dir": str(request.app.state.store.data_dir.root)}


@router.post("/data-dir/open")
async def open_data_dir(request: Request, store: AsyncDocumentStore = Depends(get_store)):
    log_command(request, "open_data_dir")
    try:
        await store.open_data_directory()
    except StoreError as e:
        raise http_error(e) from e
    return {"ok": True}


@router.get("/json/{rel_path:path}")
async def read_json(rel_path: str, request: Request, store: AsyncDocumentStore = Depends(get_store)):
    name = checked_name(rel_path)
    log_command(request, "read_json", name)
    try:
        doc = await store.load(name)
    except StoreError as e:
        raise http_error(e) from e
    return JSONResponse(content=doc)


@router.put("/json/{rel_path:path}")
async def write_json_atomic(rel_path: str, request: Request, store: AsyncDocumentStore = Depends(get_store)):
    name = checked_name(rel_path)
    # Any JSON value is a document, including null.
    try:
        data = await request.json()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"request body is not valid JSON: {e}") from e
    log_command(request, "write_json_atomic", name)
    try:
        await store.save(name, data)
    except StoreError as e:
        raise http_error(e) from e
    return {"ok": True}


@router.get("/backups")
async def list_backups(request: Request, name: str | None = None, store: AsyncDocumentStore = Depends(get_store)):
    if name is not None:
        name = checked_name(name)
    try:
        entries = await store.list_backups(name)
    except StoreError as e:
        raise http_error(e) from e
    return {"backups": [p.name for p in entries]}
