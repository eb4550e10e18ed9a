from .chat import router as chat_router
from .runs import router as runs_router

__all__ = [
    "chat_router",
    "runs_router",
]
