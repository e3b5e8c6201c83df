"""Task model"""

import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from datetime import datetime
from app.core.database import Base


class Priority(str, enum.Enum):
    """Priorités d'une tâche, de la plus basse à la plus haute."""

    LOWEST = "Lowest"
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    HIGHEST = "Highest"

    @property
    def rank(self) -> int:
        return list(Priority).index(self) + 1

    @classmethod
    def values(cls):
        return [p.value for p in cls]


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    priority = Column(String, nullable=False, default=Priority.NORMAL.value)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

