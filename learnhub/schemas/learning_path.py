from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import CamelModel


class LearningPathCreate(CamelModel):
    title: str
    description: Optional[str] = None
    language: str
    difficulty: str
    total_modules: int = Field(0, ge=0)


class LearningPath(LearningPathCreate):
    id: str
    created_at: Optional[datetime] = None


class ModuleCreate(CamelModel):
    title: str
    description: Optional[str] = None
    order: int = Field(..., ge=1)
    content: Optional[Dict[str, Any]] = None
    is_locked: Optional[bool] = Field(None, description="Defaults to locked for every module after the first")


class Module(CamelModel):
    id: str
    learning_path_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    order: int
    content: Optional[Dict[str, Any]] = None
    is_locked: bool = True
    created_at: Optional[datetime] = None


class GeneratePathRequest(CamelModel):
    language: str
    goals: List[str]
    experience: str
    time_commitment: str
