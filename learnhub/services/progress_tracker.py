from typing import Dict, List

import pandas as pd
from sqlalchemy.orm import Session

from ..models import LearningPath, Module, UserProgress

MODULE_COLUMNS = ["module_id", "title", "order"]
PROGRESS_COLUMNS = ["module_id", "progress", "completed"]


def weekly_goal_progress(hours_completed: int, weekly_goal: int) -> int:
    """Percentage of the weekly hour goal reached, as shown on the dashboard."""
    if not weekly_goal:
        return 0
    return round((hours_completed or 0) / weekly_goal * 100)


class ProgressTracker:
    def __init__(self, db: Session):
        self.db = db

    def get_path_overview(self, user_id: str, path: LearningPath) -> Dict:
        """Per-module status of one user on one learning path.

        A module reads as locked until the module before it is completed.
        This is reporting only; progress writes are never refused.
        """
        frame = self._build_frame(user_id, path.id)

        if frame.empty:
            return {
                "user_id": user_id,
                "learning_path_id": path.id,
                "completion": 0,
                "completed_modules": 0,
                "total_modules": 0,
                "modules": [],
            }

        frame["status"] = self._module_statuses(frame)

        return {
            "user_id": user_id,
            "learning_path_id": path.id,
            "completion": int(round(frame["progress"].mean())),
            "completed_modules": int(frame["completed"].sum()),
            "total_modules": len(frame),
            "modules": self._module_items(frame),
        }

    def _build_frame(self, user_id: str, path_id: str) -> pd.DataFrame:
        modules = self.db.query(Module) \
            .filter(Module.learning_path_id == path_id) \
            .order_by(Module.order) \
            .all()
        progress_rows = self.db.query(UserProgress) \
            .filter(UserProgress.user_id == user_id, UserProgress.learning_path_id == path_id) \
            .all()

        modules_df = pd.DataFrame(
            [{"module_id": m.id, "title": m.title, "order": m.order} for m in modules],
            columns=MODULE_COLUMNS,
        )
        progress_df = pd.DataFrame(
            [{"module_id": p.module_id, "progress": p.progress, "completed": p.completed} for p in progress_rows],
            columns=PROGRESS_COLUMNS,
        )

        frame = modules_df.merge(progress_df, on="module_id", how="left")
        frame["progress"] = frame["progress"].fillna(0).astype(int)
        frame["completed"] = frame["completed"].eq(True)
        return frame.sort_values("order").reset_index(drop=True)

    def _module_statuses(self, frame: pd.DataFrame) -> List[str]:
        previous_completed = frame["completed"].shift(1, fill_value=True)

        statuses = []
        for completed, progress, unlocked in zip(frame["completed"], frame["progress"], previous_completed):
            if completed:
                statuses.append("completed")
            elif not unlocked:
                statuses.append("locked")
            elif progress > 0:
                statuses.append("in-progress")
            else:
                statuses.append("available")
        return statuses

    def _module_items(self, frame: pd.DataFrame) -> List[Dict]:
        return [
            {
                "module_id": row.module_id,
                "title": row.title,
                "order": int(row.order),
                "progress": int(row.progress),
                "status": row.status,
            }
            for row in frame.itertuples(index=False)
        ]
