from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel


class ProgressUpdate(CamelModel):
    module_id: str
    progress: int = Field(..., ge=0, le=100)


class UserProgress(CamelModel):
    id: str
    user_id: Optional[str] = None
    learning_path_id: Optional[str] = None
    module_id: Optional[str] = None
    completed: bool = False
    progress: int = 0
    last_accessed: Optional[datetime] = None


class ModuleProgressItem(CamelModel):
    module_id: str
    title: str
    order: int
    progress: int
    status: Literal["completed", "in-progress", "available", "locked"]


class PathOverview(CamelModel):
    user_id: str
    learning_path_id: str
    completion: int
    completed_modules: int
    total_modules: int
    modules: List[ModuleProgressItem]
