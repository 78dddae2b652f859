import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import ProgressTracker, weekly_goal_progress
from ..storage import Storage
from ..utils.auth import get_password_hash

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/users", response_model=schemas.User)
def register_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    storage = Storage(db)
    if storage.get_user_by_username(user.username) or storage.get_user_by_email(user.email):
        raise HTTPException(status_code=400, detail="Username or email already registered")

    try:
        created = storage.create_user(user.username, user.email, get_password_hash(user.password))
    except Exception:
        logger.exception("User registration failed for %s", user.username)
        raise HTTPException(status_code=500, detail="Failed to create user")

    logger.info("Registered user %s", created.id)
    return created


@router.get("/users/{user_id}", response_model=schemas.User)
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = Storage(db).get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# Progress

@router.get("/users/{user_id}/progress", response_model=List[schemas.UserProgress])
def list_progress(user_id: str, db: Session = Depends(get_db)):
    return Storage(db).get_all_user_progress(user_id)


@router.get("/users/{user_id}/progress/{path_id}", response_model=List[schemas.UserProgress])
def get_path_progress(user_id: str, path_id: str, db: Session = Depends(get_db)):
    return Storage(db).get_user_progress(user_id, path_id)


@router.post("/users/{user_id}/progress", response_model=schemas.UserProgress)
def update_progress(user_id: str, update: schemas.ProgressUpdate, db: Session = Depends(get_db)):
    storage = Storage(db)
    if not storage.get_module(update.module_id):
        raise HTTPException(status_code=404, detail="Module not found")

    try:
        return storage.update_progress(user_id, update.module_id, update.progress)
    except Exception:
        db.rollback()
        logger.exception("Progress update failed for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to update progress")


@router.get("/users/{user_id}/learning-paths/{path_id}/overview", response_model=schemas.PathOverview)
def get_path_overview(user_id: str, path_id: str, db: Session = Depends(get_db)):
    path = Storage(db).get_learning_path(path_id)
    if not path:
        raise HTTPException(status_code=404, detail="Learning path not found")
    return ProgressTracker(db).get_path_overview(user_id, path)


# Stats

def _stats_payload(stats) -> schemas.UserStats:
    payload = schemas.UserStats.model_validate(stats)
    payload.goal_progress = weekly_goal_progress(stats.hours_completed, stats.weekly_goal)
    return payload


@router.get("/users/{user_id}/stats", response_model=schemas.UserStats)
def get_user_stats(user_id: str, db: Session = Depends(get_db)):
    stats = Storage(db).get_user_stats(user_id)
    if not stats:
        raise HTTPException(status_code=404, detail="User stats not found")
    return _stats_payload(stats)


@router.patch("/users/{user_id}/stats", response_model=schemas.UserStats)
def update_user_stats(user_id: str, update: schemas.UserStatsUpdate, db: Session = Depends(get_db)):
    stats = Storage(db).update_user_stats(user_id, update.model_dump(exclude_unset=True))
    if not stats:
        raise HTTPException(status_code=404, detail="User stats not found")
    return _stats_payload(stats)
