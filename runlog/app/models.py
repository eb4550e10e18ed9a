from pydantic import BaseModel, Field

from runlog.chat import Reply
from runlog.models import PeriodStats, RunTotals
from .env_loader import EnvironmentName


class ChatMessageRequest(BaseModel):
    """A message typed (or a button pressed) in a chat."""

    text: str
    user_name: str | None = Field(
        default=None, description="First name used in the welcome message"
    )


class OutboundDocument(BaseModel):
    """A file the bot would have attached to the chat."""

    filename: str
    content_type: str = "text/csv"
    content: str


class ChatResponse(BaseModel):
    replies: list[Reply]
    documents: list[OutboundDocument] = []


class StatsResponse(BaseModel):
    """Period stats, all-time totals and progress toward the weekly goal."""

    period: PeriodStats
    totals: RunTotals
    goal_km: float
    week_progress_percent: int


class EnvironmentResponse(BaseModel):
    environment: EnvironmentName
