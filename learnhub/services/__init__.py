from . import curriculum, ingestion, tutor
from .progress_tracker import ProgressTracker, weekly_goal_progress

__all__ = [
    'curriculum',
    'ingestion',
    'tutor',
    'ProgressTracker',
    'weekly_goal_progress',
]
