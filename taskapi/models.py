from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel
from typing_extensions import Annotated

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Postgres INTEGER range
Int32 = Annotated[int, PydanticField(ge=INT32_MIN, le=INT32_MAX)]


class TaskBase(SQLModel):
    """Base model with shared fields"""

    name: str
    priority: int | None = Field(default=None)


class Task(TaskBase, table=True):
    """Database model"""

    __tablename__ = "tasks"

    id: int | None = Field(default=None, primary_key=True)


class TaskCreate(TaskBase):
    """Schema for creating a task"""

    priority: Int32 | None = None


class TaskUpdate(SQLModel):
    """Schema for updating a task.

    Both columns are overwritten on update; a field missing from the
    request body is written as null.
    """

    name: str | None = None
    priority: Int32 | None = None


class TaskRead(TaskBase):
    """Schema for task records in responses"""

    id: int

    model_config = {"from_attributes": True}


class TaskId(SQLModel):
    id: int
