import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import (
    ChatMessage,
    ContentStatus,
    CustomContent,
    LearningPath,
    Module,
    User,
    UserProgress,
    UserStats,
)
from .services.curriculum import CurriculumTemplate

logger = logging.getLogger(__name__)

NULLABLE_STATS_FIELDS = frozenset({"last_active_date"})


class Storage:
    """Typed CRUD over the LearnHub tables.

    Every write commits before returning; callers get refreshed rows back.
    """

    def __init__(self, db: Session):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, username: str, email: str, password_hash: str) -> User:
        """Insert the user together with its zeroed stats row."""
        user = User(username=username, email=email, password=password_hash)
        self.db.add(user)
        try:
            self.db.flush()
            self.db.add(UserStats(user_id=user.id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    # Learning paths and modules

    def get_all_learning_paths(self) -> List[LearningPath]:
        return self.db.query(LearningPath).order_by(LearningPath.title.asc()).all()

    def get_learning_path(self, path_id: str) -> Optional[LearningPath]:
        return self.db.query(LearningPath).filter(LearningPath.id == path_id).first()

    def create_learning_path(self, **fields) -> LearningPath:
        return self._save(LearningPath(**fields))

    def create_learning_path_with_modules(self, template: CurriculumTemplate) -> LearningPath:
        """Persist a generated path and all of its modules in one transaction.

        Either every module lands or nothing does, so ``total_modules``
        always matches the stored module count.
        """
        path = LearningPath(
            title=template.title,
            description=template.description,
            language=template.language,
            difficulty=template.difficulty,
            total_modules=len(template.modules),
        )
        try:
            self.db.add(path)
            self.db.flush()
            for module in template.modules:
                self.db.add(Module(
                    learning_path_id=path.id,
                    title=module.title,
                    description=module.description,
                    order=module.order,
                    content=module.as_content(),
                    is_locked=module.order > 1,
                ))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(path)
        return path

    def get_modules_by_path(self, path_id: str) -> List[Module]:
        return self.db.query(Module) \
            .filter(Module.learning_path_id == path_id) \
            .order_by(Module.order.asc()) \
            .all()

    def get_module(self, module_id: str) -> Optional[Module]:
        return self.db.query(Module).filter(Module.id == module_id).first()

    def create_module(self, path: LearningPath, **fields) -> Module:
        """Attach a module and bump the path's module count."""
        module = Module(learning_path_id=path.id, **fields)
        self.db.add(module)
        path.total_modules = (path.total_modules or 0) + 1
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(module)
        return module

    # Progress

    def get_user_progress(self, user_id: str, path_id: str) -> List[UserProgress]:
        return self.db.query(UserProgress).filter(
            UserProgress.user_id == user_id,
            UserProgress.learning_path_id == path_id
        ).all()

    def get_all_user_progress(self, user_id: str) -> List[UserProgress]:
        return self.db.query(UserProgress) \
            .filter(UserProgress.user_id == user_id) \
            .order_by(UserProgress.last_accessed.desc()) \
            .all()

    def _find_progress(self, user_id: str, module_id: str) -> Optional[UserProgress]:
        return self.db.query(UserProgress).filter(
            UserProgress.user_id == user_id,
            UserProgress.module_id == module_id
        ).first()

    def _apply_progress(self, record: UserProgress, progress: int) -> UserProgress:
        record.progress = progress
        record.completed = progress >= 100
        record.last_accessed = datetime.utcnow()
        self.db.commit()
        self.db.refresh(record)
        return record

    def update_progress(self, user_id: str, module_id: str, progress: int) -> UserProgress:
        """Update the (user, module) row if there is one, otherwise insert it.

        This is a read followed by a write, not an atomic upsert. If another
        request inserts the same pair in between, the unique constraint
        rejects our insert and the write is replayed as an update.
        """
        existing = self._find_progress(user_id, module_id)
        if existing:
            return self._apply_progress(existing, progress)

        module = self.get_module(module_id)
        record = UserProgress(
            user_id=user_id,
            module_id=module_id,
            learning_path_id=module.learning_path_id if module else None,
            progress=progress,
            completed=progress >= 100,
        )
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self._find_progress(user_id, module_id)
            if existing is None:
                raise
            logger.warning("Concurrent progress insert for user=%s module=%s; updating instead",
                           user_id, module_id)
            return self._apply_progress(existing, progress)

        self.db.refresh(record)
        return record

    # Custom content

    def get_user_custom_content(self, user_id: str) -> List[CustomContent]:
        return self.db.query(CustomContent) \
            .filter(CustomContent.user_id == user_id) \
            .order_by(CustomContent.created_at.desc()) \
            .all()

    def create_custom_content(self, **fields) -> CustomContent:
        return self._save(CustomContent(**fields))

    def update_custom_content_status(self, content_id: str, status: ContentStatus,
                                     content: Optional[str] = None) -> Optional[CustomContent]:
        record = self.db.query(CustomContent).filter(CustomContent.id == content_id).first()
        if not record:
            return None
        record.status = ContentStatus(status).value
        if content is not None:
            record.content = content
        self.db.commit()
        self.db.refresh(record)
        return record

    # Chat

    def get_user_chat_messages(self, user_id: str, limit: int = 50) -> List[ChatMessage]:
        """Most recent messages first."""
        return self.db.query(ChatMessage) \
            .filter(ChatMessage.user_id == user_id) \
            .order_by(ChatMessage.timestamp.desc(), ChatMessage.seq.desc()) \
            .limit(limit) \
            .all()

    def create_chat_message(self, user_id: str, role: str, content: str) -> ChatMessage:
        return self._save(ChatMessage(user_id=user_id, role=role, content=content))

    # Stats

    def get_user_stats(self, user_id: str) -> Optional[UserStats]:
        return self.db.query(UserStats).filter(UserStats.user_id == user_id).first()

    def update_user_stats(self, user_id: str, fields: Dict) -> Optional[UserStats]:
        stats = self.get_user_stats(user_id)
        if not stats:
            return None
        for key, value in fields.items():
            if value is None and key not in NULLABLE_STATS_FIELDS:
                continue
            setattr(stats, key, value)
        self.db.commit()
        self.db.refresh(stats)
        return stats


def chronological(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
    return list(reversed(list(messages)))
