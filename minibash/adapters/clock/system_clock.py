"""
Wall clock adapter.
"""

from datetime import datetime, timezone

from typing_extensions import override

from minibash.ports.clock.clock_port import ClockPort


class SystemClock(ClockPort):
    """Clock backed by the system wall clock."""

    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
