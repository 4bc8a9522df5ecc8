from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from pmstore.errors import StoreError
from pmstore.repositories import AsyncTaskRepository

from .deps import get_task_repo, http_error, log_command

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks(repo: AsyncTaskRepository = Depends(get_task_repo)):
    try:
        return {"tasks": await repo.list()}
    except StoreError as e:
        raise http_error(e) from e


@router.post("", status_code=201)
async def add_task(
    request: Request,
    task: dict[str, Any] = Body(...),
    repo: AsyncTaskRepository = Depends(get_task_repo),
):
    log_command(request, "add_task", task.get("id"))
    try:
        await repo.add(task)
    except StoreError as e:
        raise http_error(e) from e
    return {"ok": True}


@router.post("/bulk", status_code=201)
async def bulk_add_tasks(
    request: Request,
    tasks: list[dict[str, Any]] = Body(...),
    repo: AsyncTaskRepository = Depends(get_task_repo),
):
    log_command(request, "bulk_add_tasks", len(tasks))
    try:
        await repo.bulk_add(tasks)
    except StoreError as e:
        raise http_error(e) from e
    return {"ok": True}


@router.put("")
async def save_all_tasks(
    request: Request,
    tasks: list[dict[str, Any]] = Body(...),
    repo: AsyncTaskRepository = Depends(get_task_repo),
):
    log_command(request, "save_all_tasks", len(tasks))
    try:
        await repo.save_all(tasks)
    except StoreError as e:
        raise http_error(e) from e
    return {"ok": True}


@router.patch("/{task_id}")
async def update_task(
    task_id: str,
    request: Request,
    patch: dict[str, Any] = Body(...),
    repo: AsyncTaskRepository = Depends(get_task_repo),
):
    log_command(request, "update_task", task_id)
    try:
        found = await repo.update(task_id, patch)
    except StoreError as e:
        raise http_error(e) from e
    if not found:
        raise HTTPException(status_code=404, detail=f"unknown task id: {task_id}")
    return {"ok": True}


@router.delete("/{task_id}")
async def remove_task(task_id: str, request: Request, repo: AsyncTaskRepository = Depends(get_task_repo)):
    log_command(request, "remove_task", task_id)
    try:
        found = await repo.remove(task_id)
    except StoreError as e:
        raise http_error(e) from e
    if not found:
        raise HTTPException(status_code=404, detail=f"unknown task id: {task_id}")
    return {"ok": True}
