import threading

from .workflow import EntryState


class WorkflowSessions:
    """Per-conversation workflow state, keyed by chat id.

    A chat with no entry is idle. Conversations never see each other's state.
    """

    def __init__(self) -> None:
        self._states: dict[str, EntryState] = {}
        self._lock = threading.Lock()

    def get(self, chat_id: str) -> EntryState | None:
        with self._lock:
            return self._states.get(chat_id)

    def set(self, chat_id: str, state: EntryState) -> None:
        with self._lock:
            self._states[chat_id] = state

    def discard(self, chat_id: str) -> bool:
        """Drop the chat's workflow state. Returns whether there was one."""
        with self._lock:
            return self._states.pop(chat_id, None) is not None

    def active_count(self) -> int:
        with self._lock:
            return len(self._states)
