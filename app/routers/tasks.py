from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.database import get_db
from app.core.guard import Principal, get_current_principal
from app.schemas.task import TaskPayload, TaskResponse
from app.services import task_service

# Le guard s'exécute avant tout accès aux tâches
router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
    priority: Optional[str] = Query(None)
):
    return task_service.list_tasks(db, principal.user_id, priority)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskPayload,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    return task_service.create_task(
        db,
        principal.user_id,
        task_data.name,
        task_data.description,
        task_data.priority,
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    return task_service.get_task(db, principal.user_id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskPayload,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    return task_service.update_task(
        db,
        principal.user_id,
        task_id,
        task_data.name,
        task_data.description,
        task_data.priority,
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    task_service.delete_task(db, principal.user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
