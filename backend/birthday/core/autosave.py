"""Name Debouncer — timer-reset-on-input state machine for name auto-save.

Invariants:
    - offer() replaces the pending value and pushes the deadline to now + quiet_period
    - due() yields at most one value per deadline, then clears the pending state
    - A value is yielded only if trimmed, non-empty, and != last known committed name
    - Pure: time is passed in by the caller, no timers or event loop here
"""

from dataclasses import dataclass


@dataclass
class NameDebouncer:
    quiet_period: float
    pending: str | None = None
    deadline: float | None = None
    last_committed: str | None = None

    def offer(self, raw: str, now: float) -> float:
        """Record a new input value. Returns the new deadline."""
        self.pending = raw
        self.deadline = now + self.quiet_period
        return self.deadline

    def is_due(self, now: float) -> bool:
        return self.deadline is not None and now >= self.deadline

    def due(self, now: float) -> str | None:
        """Return the name to commit if the quiet period elapsed, else None."""
        if not self.is_due(now):
            return None
        value = (self.pending or "").strip()
        self.pending = None
        self.deadline = None
        if not value or value == self.last_committed:
            return None
        self.last_committed = value
        return value

    def sync_committed(self, name: str | None) -> None:
        """Align with the name currently stored (e.g. from the observe stream)."""
        self.last_committed = name.strip() if name else None

    def commit_failed(self, name: str) -> None:
        if self.last_committed == name:
            self.last_committed = None

    @property
    def has_pending(self) -> bool:
        return self.deadline is not None
