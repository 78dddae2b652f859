from . import chat, custom_content, learning_path, progress, user
from .chat import ChatMessage, ChatRequest, ChatResponse, CodeExample
from .custom_content import CustomContent
from .learning_path import GeneratePathRequest, LearningPath, LearningPathCreate, Module, ModuleCreate
from .progress import ModuleProgressItem, PathOverview, ProgressUpdate, UserProgress
from .user import User, UserCreate, UserStats, UserStatsUpdate
