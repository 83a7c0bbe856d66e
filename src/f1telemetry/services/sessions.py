"""Session filtering and per-meeting grouping for the session list."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from ..constants import FILTER_ALL, SESSION_TYPE_ORDER, UNKNOWN_SESSION_RANK
from ..models import Meeting, Session

GroupKey = tuple[int | None, str | None, str | None, str | None, datetime | None]


@dataclass
class SessionGroup:
    """Sessions of one meeting, plus the UI's expand/collapse flag."""

    meeting_key: int | None
    meeting_name: str
    location: str | None
    circuit_name: str | None
    country_name: str | None
    date_start: datetime | None
    sessions: list[Session] = field(default_factory=list)
    is_expanded: bool = True

    def toggle(self) -> None:
        """Flip the display flag; membership and ordering are unaffected."""
        self.is_expanded = not self.is_expanded

    @property
    def session_count_label(self) -> str:
        count = len(self.sessions)
        return f"{count} session{'s' if count != 1 else ''}"

    @property
    def formatted_date(self) -> str:
        return self.date_start.strftime("%b %d, %Y") if self.date_start else ""

    def __len__(self) -> int:
        return len(self.sessions)


def is_all_filter(token: str | None) -> bool:
    return not token or token.strip().lower() == FILTER_ALL.lower()


def filter_sessions(sessions: Iterable[Session], token: str | None) -> list[Session]:
    """Keep sessions whose type contains *token* (case-insensitive), or all."""
    if is_all_filter(token):
        return list(sessions)
    needle = token.strip().lower()  # type: ignore[union-attr]
    return [s for s in sessions if needle in (s.session_type or "").lower()]


def session_type_rank(session: Session) -> int:
    """Practice 1, Qualifying 2, Sprint 3, Race 4, anything else 5.

    OpenF1 types a sprint as "Race" and names it "Sprint", so the name is
    consulted after the type.
    """
    described = f"{session.session_type or ''} {session.session_name or ''}".lower()
    for needle, rank in SESSION_TYPE_ORDER:
        if needle in described:
            return rank
    return UNKNOWN_SESSION_RANK


def _group_key(session: Session, meeting: Meeting | None) -> GroupKey:
    # Meeting date when known, else the session's own start (may fragment a meeting)
    start = meeting.date_start if meeting is not None and meeting.date_start else session.date_start
    return (
        session.meeting_key,
        session.location,
        session.circuit_short_name,
        session.country_name,
        start,
    )


def _meeting_name(session: Session, meeting: Meeting | None) -> str:
    if meeting is not None and meeting.meeting_name:
        return meeting.meeting_name
    return session.country_name or session.location or "Unknown meeting"


def _sort_date(group: SessionGroup) -> float:
    if group.date_start is None:
        return float("-inf")
    return group.date_start.timestamp()


def group_sessions(
    sessions: Iterable[Session],
    token: str | None = FILTER_ALL,
    meetings: Iterable[Meeting] | None = None,
) -> list[SessionGroup]:
    """Filter, group by meeting identity, newest meeting first.

    Sessions within a group follow the session-type precedence, keeping
    their input order on ties. Groups are always rebuilt from scratch.
    """
    by_meeting_key = {m.meeting_key: m for m in meetings or () if m.meeting_key is not None}

    groups: dict[GroupKey, SessionGroup] = {}
    for session in filter_sessions(sessions, token):
        meeting = by_meeting_key.get(session.meeting_key)
        key = _group_key(session, meeting)
        group = groups.get(key)
        if group is None:
            group = SessionGroup(
                meeting_key=session.meeting_key,
                meeting_name=_meeting_name(session, meeting),
                location=session.location,
                circuit_name=session.circuit_short_name,
                country_name=session.country_name,
                date_start=key[4],
            )
            groups[key] = group
        group.sessions.append(session)

    for group in groups.values():
        group.sessions.sort(key=session_type_rank)
    return sorted(groups.values(), key=_sort_date, reverse=True)
