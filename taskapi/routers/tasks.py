import asyncio
import logging

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from typing_extensions import Annotated

from taskapi.database import get_db
from taskapi.models import INT32_MAX, INT32_MIN, TaskCreate, TaskUpdate
from taskapi.responses import failure, success
from taskapi.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

DB_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)

TaskIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.get("", response_class=JSONResponse)
async def get_tasks(db: AsyncSession = Depends(get_db)):
    """List all tasks ordered by id"""
    try:
        tasks = await TaskService.get_all_tasks(db)
    except DB_ERRORS as exc:
        logger.error("Listing tasks failed: %s", exc)
        return failure(exc)
    return success(tasks)


@router.post("", response_class=JSONResponse)
async def create_task(task_data: TaskCreate, db: AsyncSession = Depends(get_db)):
    """Create a new task"""
    try:
        created = await TaskService.create_task(task_data, db)
    except DB_ERRORS as exc:
        logger.error("Creating task failed: %s", exc)
        return failure(exc)
    logger.debug("Created task %d", created.id)
    return success(created)


@router.put("/{task_id}", response_class=JSONResponse)
async def update_task(
    task_id: TaskIdPath, task_data: TaskUpdate, db: AsyncSession = Depends(get_db)
):
    try:
        await TaskService.update_task(task_id, task_data, db)
    except DB_ERRORS as exc:
        logger.error("Updating task %d failed: %s", task_id, exc)
        return failure(exc)
    return success()


@router.delete("/{task_id}", response_class=JSONResponse)
async def delete_task(task_id: TaskIdPath, db: AsyncSession = Depends(get_db)):
    """Delete a task"""
    try:
        await TaskService.delete_task(task_id, db)
    except DB_ERRORS as exc:
        logger.error("Deleting task %d failed: %s", task_id, exc)
        return failure(exc)
    return success()
