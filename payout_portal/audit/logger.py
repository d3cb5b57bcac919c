"""
Session activity trail for account and payout operations.

Every state-changing action gets an append-only entry with:
  - Action (what happened)
  - Account ID and payout request ID, when known
  - Details (context, error messages, server status)
  - Timestamp (UTC)

The trail lives in memory for the current session and is mirrored to the
``payout_portal.audit`` logger.
"""

import json
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger("payout_portal.audit")

MAX_ENTRIES = 200


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditEntry:
    action: str
    account_id: Optional[str] = None
    payout_request_id: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)


class AuditTrail:
    """Bounded, append-only list of the session's actions."""

    def __init__(self, max_entries: int = MAX_ENTRIES):
        self._entries: deque[AuditEntry] = deque(maxlen=max_entries)

    def log_event(
        self,
        action: str,
        account_id: Optional[str] = None,
        payout_request_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> AuditEntry:
        """
        Record an audit entry.

        Args:
            action: What happened (e.g. "account_created", "payout_executed").
            account_id: The account the action concerned.
            payout_request_id: The payout request the action concerned.
            details: Arbitrary context (must be JSON-serializable).

        Returns:
            The recorded AuditEntry.
        """
        entry = AuditEntry(
            action=action,
            account_id=account_id,
            payout_request_id=payout_request_id,
            details=details or {},
        )
        self._entries.append(entry)
        logger.info(
            "AUDIT | account=%s payout=%s action=%s | %s",
            account_id or "-",
            payout_request_id or "-",
            action,
            json.dumps(details, default=str)[:200] if details else "",
        )
        return entry

    @property
    def entries(self) -> list[AuditEntry]:
        return list(self._entries)

    def recent(self, limit: int = 20) -> list[AuditEntry]:
        """Most recent entries, newest last."""
        return self.entries[-limit:]
