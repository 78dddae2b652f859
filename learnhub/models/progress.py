from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base, generate_id


class UserProgress(Base):
    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "module_id", name="uq_user_progress_user_module"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"))
    learning_path_id = Column(String(36), ForeignKey("learning_paths.id"))
    module_id = Column(String(36), ForeignKey("modules.id"))
    completed = Column(Boolean, default=False)  # progress >= 100
    progress = Column(Integer, default=0)  # percentage
    last_accessed = Column(DateTime, default=datetime.utcnow)

    module = relationship("Module")
