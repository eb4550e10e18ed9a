import os
from datetime import datetime
from pathlib import Path

import pytest

# Ensure allowed environment for env_loader
os.environ.setdefault("ENV", "dev")

from runlog.app import env_loader  # noqa: F401, E402
from runlog.chat import Dispatcher, WorkflowSessions  # noqa: E402
from runlog.db.store import InMemoryRunStore  # noqa: E402

from ._factories import RunFactory  # noqa: E402

# A Wednesday; its week starts on Monday 2024-05-13.
FIXED_NOW = datetime(2024, 5, 15, 18, 30)


class RecordingDocumentSender:
    """Document sender that keeps a copy of everything it is asked to deliver."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self.paths: list[Path] = []

    async def send_document(self, chat_id: str, path: Path, filename: str) -> None:
        self.paths.append(path)
        self.sent.append((chat_id, filename, path.read_text(encoding="utf-8")))


class FailingDocumentSender:
    def __init__(self) -> None:
        self.paths: list[Path] = []

    async def send_document(self, chat_id: str, path: Path, filename: str) -> None:
        self.paths.append(path)
        raise OSError("network unreachable")


@pytest.fixture(scope="session")
def run_factory() -> RunFactory:
    return RunFactory()


@pytest.fixture
def store() -> InMemoryRunStore:
    return InMemoryRunStore()


@pytest.fixture
def sessions() -> WorkflowSessions:
    return WorkflowSessions()


@pytest.fixture
def dispatcher(
    store: InMemoryRunStore, sessions: WorkflowSessions, tmp_path: Path
) -> Dispatcher:
    return Dispatcher(store, sessions, clock=lambda: FIXED_NOW, export_dir=tmp_path)


@pytest.fixture
def sender() -> RecordingDocumentSender:
    return RecordingDocumentSender()
