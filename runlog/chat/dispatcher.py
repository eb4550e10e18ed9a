"""Route incoming chat messages to reports, the entry workflow, goal changes and export."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Protocol

from runlog.agg import compute_stats, summarize_runs
from runlog.config.limits import MAX_WEEKLY_GOAL_KM
from runlog.db.store import RunStore
from runlog.export import staged_export
from runlog.models import Run, RunEntry
from runlog.utils.clock import now as local_now
from runlog.utils.parsing import parse_decimal
from . import reports
from .actions import InboundAction, parse_action
from .replies import MAIN_MENU, Reply
from .sessions import WorkflowSessions
from .workflow import Completed, EntryState, advance, start_entry

logger = logging.getLogger(__name__)


class DocumentSender(Protocol):
    """Delivers a file to a chat; provided by the transport."""

    async def send_document(self, chat_id: str, path: Path, filename: str) -> None: ...


class Dispatcher:
    """Handles one chat message at a time and returns the replies to send.

    The run store and goal are shared by every chat; workflow state is kept
    per chat in `sessions`.
    """

    def __init__(
        self,
        store: RunStore,
        sessions: WorkflowSessions,
        clock: Callable[[], datetime] = local_now,
        export_dir: str | Path | None = None,
    ):
        self.store = store
        self.sessions = sessions
        self.clock = clock
        self.export_dir = export_dir

    async def handle(
        self,
        chat_id: str,
        text: str,
        sender: DocumentSender,
        user_name: str | None = None,
    ) -> list[Reply]:
        action = parse_action(text)

        state = self.sessions.get(chat_id)
        if state is not None:
            # While an entry is in progress, everything except /cancel is an answer.
            if action is not None and action.kind == "cancel":
                return [self._cancel_entry(chat_id)]
            return [self._continue_entry(chat_id, state, text)]

        if action is None:
            return [Reply(text=reports.UNKNOWN_INPUT, keyboard=MAIN_MENU)]

        match action.kind:
            case "start":
                welcome = reports.render_welcome(self.store.get_goal(), user_name)
                return [Reply(text=welcome, keyboard=MAIN_MENU)]
            case "new_run":
                return [self._start_entry(chat_id)]
            case "week":
                return [self._week_report(action)]
            case "last_run":
                return [self._last_run_report(action)]
            case "goal":
                return [self._goal(action)]
            case "export":
                return await self._export(chat_id, sender)
            case "stats":
                return [self._full_stats()]
            case "cancel":
                return [Reply(text=reports.NOTHING_TO_CANCEL, keyboard=MAIN_MENU)]

    def _start_entry(self, chat_id: str) -> Reply:
        state, effect = start_entry()
        self.sessions.set(chat_id, state)
        logger.debug(f"Chat {chat_id} started a run entry")
        return effect.reply

    def _cancel_entry(self, chat_id: str) -> Reply:
        self.sessions.discard(chat_id)
        logger.debug(f"Chat {chat_id} cancelled its run entry")
        return Reply(text=reports.ENTRY_CANCELLED, keyboard=MAIN_MENU)

    def _continue_entry(self, chat_id: str, state: EntryState, text: str) -> Reply:
        next_state, effect = advance(state, text)
        if isinstance(effect, Completed):
            self.sessions.discard(chat_id)
            return self._save_run(effect.entry)
        self.sessions.set(chat_id, next_state)
        return effect.reply

    def _save_run(self, entry: RunEntry) -> Reply:
        now = self.clock()
        run = Run.from_entry(entry, now.date())
        self.store.append(run)
        logger.info(f"Saved run: {run.distance_km} km, {run.duration_min} min")

        stats = compute_stats(self.store.list_runs(), now)
        text = reports.render_run_saved(run, stats, self.store.get_goal())
        return Reply(text=text, keyboard=MAIN_MENU)

    def _week_report(self, action: InboundAction) -> Reply:
        stats = compute_stats(self.store.list_runs(), self.clock())
        goal = self.store.get_goal()
        if action.source == "menu":
            return Reply(text=reports.render_week_menu(stats, goal))
        return Reply(text=reports.render_week_command(stats, goal))

    def _last_run_report(self, action: InboundAction) -> Reply:
        run = self.store.last_run()
        if action.source == "menu":
            if run is None:
                return Reply(text=reports.NO_RUNS_MENU)
            return Reply(text=reports.render_last_run_menu(run))
        if run is None:
            return Reply(text=reports.NO_RUNS_COMMAND)
        return Reply(text=reports.render_last_run_command(run))

    def _goal(self, action: InboundAction) -> Reply:
        if not action.args:
            return Reply(text=reports.render_goal(self.store.get_goal()))
        if len(action.args) != 1:
            return Reply(text=reports.INVALID_GOAL)

        goal = parse_decimal(action.args[0])
        if goal is None or not 0 < goal <= MAX_WEEKLY_GOAL_KM:
            return Reply(text=reports.INVALID_GOAL)

        self.store.set_goal(goal)
        logger.info(f"Weekly goal set to {goal} km")
        return Reply(text=reports.render_goal_updated(goal))

    async def _export(self, chat_id: str, sender: DocumentSender) -> list[Reply]:
        runs = self.store.list_runs()
        if not runs:
            return [Reply(text=reports.NO_EXPORT_DATA)]

        try:
            with staged_export(runs, self.clock().date(), self.export_dir) as path:
                await sender.send_document(chat_id, path, path.name)
        except Exception as e:
            logger.error(
                f"Failed to export runs for chat {chat_id}: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return [Reply(text=reports.EXPORT_FAILED)]

        logger.info(f"Exported {len(runs)} runs to chat {chat_id}")
        return []

    def _full_stats(self) -> Reply:
        runs = self.store.list_runs()
        totals = summarize_runs(runs)
        stats = compute_stats(runs, self.clock())
        return Reply(text=reports.render_full_stats(totals, stats))
