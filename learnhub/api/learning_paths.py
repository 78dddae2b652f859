import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["learning-paths"])


@router.get("/learning-paths", response_model=List[schemas.LearningPath])
def list_learning_paths(db: Session = Depends(get_db)):
    return Storage(db).get_all_learning_paths()


@router.post("/learning-paths", response_model=schemas.LearningPath)
def create_learning_path(path: schemas.LearningPathCreate, db: Session = Depends(get_db)):
    try:
        created = Storage(db).create_learning_path(**path.model_dump())
    except Exception:
        db.rollback()
        logger.exception("Learning path insert failed")
        raise HTTPException(status_code=500, detail="Failed to create learning path")

    logger.info("Created learning path %s (%s)", created.id, created.language)
    return created


@router.get("/learning-paths/{path_id}", response_model=schemas.LearningPath)
def get_learning_path(path_id: str, db: Session = Depends(get_db)):
    path = Storage(db).get_learning_path(path_id)
    if not path:
        raise HTTPException(status_code=404, detail="Learning path not found")
    return path


@router.get("/learning-paths/{path_id}/modules", response_model=List[schemas.Module])
def list_modules(path_id: str, db: Session = Depends(get_db)):
    return Storage(db).get_modules_by_path(path_id)


@router.post("/learning-paths/{path_id}/modules", response_model=schemas.Module)
def add_module(path_id: str, module: schemas.ModuleCreate, db: Session = Depends(get_db)):
    storage = Storage(db)
    path = storage.get_learning_path(path_id)
    if not path:
        raise HTTPException(status_code=404, detail="Learning path not found")

    fields = module.model_dump()
    if fields["is_locked"] is None:
        fields["is_locked"] = module.order > 1

    try:
        return storage.create_module(path, **fields)
    except Exception:
        logger.exception("Module insert failed for path %s", path_id)
        raise HTTPException(status_code=500, detail="Failed to create module")


@router.get("/modules/{module_id}", response_model=schemas.Module)
def get_module(module_id: str, db: Session = Depends(get_db)):
    module = Storage(db).get_module(module_id)
    if not module:
        raise HTTPException(status_code=404, detail="Module not found")
    return module
