from sqlalchemy import delete, insert, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskapi.models import Task, TaskCreate, TaskId, TaskRead, TaskUpdate


class TaskService:
    @staticmethod
    async def get_all_tasks(db: AsyncSession) -> list[TaskRead]:
        result = await db.exec(select(Task).order_by(Task.id))
        return [TaskRead.model_validate(task) for task in result.all()]

    @staticmethod
    async def create_task(task_data: TaskCreate, db: AsyncSession) -> TaskId:
        query = (
            insert(Task)
            .values(name=task_data.name, priority=task_data.priority)
            .returning(Task.id)
        )
        result = await db.exec(query)
        task_id = result.scalar_one()
        await db.commit()
        return TaskId(id=task_id)

    # Full replace: unset fields are written as null. No existence check.
    @staticmethod
    async def update_task(task_id: int, task_data: TaskUpdate, db: AsyncSession):
        query = (
            update(Task)
            .where(Task.id == task_id)
            .values(name=task_data.name, priority=task_data.priority)
        )
        await db.exec(query)
        await db.commit()

    @staticmethod
    async def delete_task(task_id: int, db: AsyncSession):
        await db.exec(delete(Task).where(Task.id == task_id))
        await db.commit()
