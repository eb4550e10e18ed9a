from .run import RunFactory

__all__ = [
    "RunFactory",
]
