from datetime import datetime

from runlog.chat import Dispatcher, WorkflowSessions
from runlog.db.store import InMemoryRunStore, RunStore
from runlog.utils.clock import now
from .env_loader import get_default_weekly_goal, get_export_dir

# One store and one set of conversations per process.
_store = InMemoryRunStore(goal_km=get_default_weekly_goal())
_sessions = WorkflowSessions()
_dispatcher = Dispatcher(_store, _sessions, export_dir=get_export_dir())


def run_store() -> RunStore:
    return _store


def dispatcher() -> Dispatcher:
    """Get the dispatcher wired to the process-wide store."""
    return _dispatcher


def current_time() -> datetime:
    return now()
