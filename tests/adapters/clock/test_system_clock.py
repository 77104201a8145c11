"""
Tests for the SystemClock adapter.
"""

from datetime import datetime, timezone

from minibash.adapters.clock.system_clock import SystemClock


class TestSystemClock:
    """Test cases for the SystemClock."""

    def test_now_is_current_time(self):
        """Test that now() falls between two wall clock readings."""
        before = datetime.now(timezone.utc)
        now = SystemClock().now()
        after = datetime.now(timezone.utc)

        assert before <= now <= after

    def test_now_is_timezone_aware(self):
        """Test that now() carries UTC so it compares with file timestamps."""
        assert SystemClock().now().utcoffset() is not None
