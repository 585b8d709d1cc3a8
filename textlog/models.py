"""Log entry and request context models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from textlog.priorities import Priority


@dataclass
class LogEntry:
    message: str
    priority: int = Priority.INFO
    category: str = ""
    # datetime, or a normalised YYYY-MM-DD string once a writer has seen it
    date: datetime | str = field(default_factory=lambda: datetime.now(timezone.utc))
    time: str | None = None        # HH:MM:SS, UTC
    datetime: str | None = None    # ISO 8601, UTC
    client_ip: str | None = None


@dataclass(frozen=True)
class RequestContext:
    """Client-origin signals of the request that produced an entry."""

    remote_addr: str | None = None
    forwarded_for: str | None = None
    client_ip: str | None = None

    @classmethod
    def from_environ(cls, environ: dict) -> RequestContext:
        """Build a context from a WSGI/CGI environ mapping."""
        return cls(
            remote_addr=environ.get("REMOTE_ADDR") or None,
            forwarded_for=environ.get("HTTP_X_FORWARDED_FOR") or None,
            client_ip=environ.get("HTTP_CLIENT_IP") or None,
        )
