import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session, select

from checklist.app.db.session import get_session
from checklist.app.db.models import Task
from checklist.app.schemas.records import Bucket, TaskCreate, TaskUpdate
from checklist.app.services.grouping import grouped_view
from checklist.app.utils.time_format import month_from_date

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"description": "Not found"}},
)

def get_task_or_404(session: Session, task_id: int) -> Task:
    task = session.get(Task, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task

@router.get("/", response_model=List[Task])
def list_tasks(session: Session = Depends(get_session)):
    return session.exec(select(Task).order_by(Task.id)).all()

@router.get("/grouped", response_model=List[Bucket])
def list_tasks_grouped(session: Session = Depends(get_session)):
    """Tasks by month and room; incomplete first, then by due date/time."""
    tasks = session.exec(select(Task).order_by(Task.id)).all()
    return grouped_view([t.model_dump() for t in tasks], "tasks")

@router.get("/{task_id}", response_model=Task)
def get_task(task_id: int, session: Session = Depends(get_session)):
    return get_task_or_404(session, task_id)

@router.post("/", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(request: TaskCreate, session: Session = Depends(get_session)):
    data = request.model_dump()
    # File dated tasks under their due month unless a month was picked
    if not data["month"]:
        data["month"] = month_from_date(data["due_date"])

    task = Task(**data)
    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Created task %s (%s)", task.id, task.month or "no month")
    return task

@router.put("/{task_id}", response_model=Task)
def update_task(task_id: int, request: TaskUpdate, session: Session = Depends(get_session)):
    task = get_task_or_404(session, task_id)

    changes = request.model_dump(exclude_unset=True)
    if "task" in changes and changes["task"] is None:
        raise HTTPException(status_code=422, detail="Task text cannot be empty.")
    if changes.get("complete") is None:
        changes.pop("complete", None)

    for key, value in changes.items():
        setattr(task, key, value)
    task.updated_at = datetime.now()

    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Updated task %s: %s", task.id, ", ".join(sorted(changes)) or "no changes")
    return task

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, session: Session = Depends(get_session)):
    task = get_task_or_404(session, task_id)
    session.delete(task)
    session.commit()
    logger.info("Deleted task %s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
