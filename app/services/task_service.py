"""Task service

Toutes les opérations sont limitées aux tâches du propriétaire. Une tâche
inexistante et une tâche d'un autre utilisateur donnent la même erreur
NotFound.
"""

import logging
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional
from app.core.errors import NotFound, ValidationError
from app.models.task import Priority, Task

logger = logging.getLogger(__name__)

# ids hors de l'INTEGER SQL : aucune tâche ne peut exister
MAX_TASK_ID = 2**31 - 1


def _check_priority(priority: str) -> None:
    if priority not in Priority.values():
        raise ValidationError(f"Priority must be one of: {', '.join(Priority.values())}")


def _validate_fields(name: Optional[str], description: Optional[str], priority: Optional[str]) -> None:
    if not name or not description or not priority:
        raise ValidationError("Name, description, and priority are required")
    _check_priority(priority)


def _owned_task(db: Session, owner_id: int, task_id: int) -> Task:
    """Charge la tâche et vérifie task.user_id == owner_id"""
    if not 1 <= task_id <= MAX_TASK_ID:
        raise NotFound()
    task = db.query(Task).filter(Task.id == task_id).first()
    if task is None or task.user_id != owner_id:
        raise NotFound()
    return task


def list_tasks(db: Session, owner_id: int, priority: Optional[str] = None) -> List[Task]:
    query = db.query(Task).filter(Task.user_id == owner_id)

    if priority:
        _check_priority(priority)
        query = query.filter(Task.priority == priority)

    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()


def create_task(db: Session, owner_id: int, name: str, description: str, priority: str) -> Task:
    _validate_fields(name, description, priority)

    now = datetime.utcnow()
    task = Task(
        user_id=owner_id,
        name=name,
        description=description,
        priority=priority,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task %s created for user %s", task.id, owner_id)
    return task


def get_task(db: Session, owner_id: int, task_id: int) -> Task:
    return _owned_task(db, owner_id, task_id)


def update_task(
    db: Session,
    owner_id: int,
    task_id: int,
    name: str,
    description: str,
    priority: str,
) -> Task:
    task = _owned_task(db, owner_id, task_id)
    _validate_fields(name, description, priority)

    task.name = name
    task.description = description
    task.priority = priority
    task.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, owner_id: int, task_id: int) -> None:
    _owned_task(db, owner_id, task_id)

    # delete conditionnel (id, propriétaire) : 0 ligne => NotFound
    deleted = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == owner_id
    ).delete(synchronize_session=False)
    db.commit()

    if deleted == 0:
        raise NotFound()
    logger.info("Task %s deleted by user %s", task_id, owner_id)
