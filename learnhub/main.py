from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import (
    ai_tutor,
    chat,
    custom_content,
    learning_paths,
    users
)
from .config import settings
from .database import Base, engine
from .utils.errors import register_exception_handlers
from .utils.logger import configure_logging

configure_logging(settings.LOG_LEVEL)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="LearnHub API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(learning_paths.router, prefix="/api")
app.include_router(ai_tutor.router, prefix="/api")
app.include_router(chat.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(custom_content.router, prefix="/api")


@app.get("/api/health", tags=["health"])
def health():
    return {"status": "ok"}
