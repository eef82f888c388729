"""Wall-clock capability used for expiry checks.

Anything that returns a timezone-aware ``datetime`` when called is a clock,
so tests can pin "now" with a lambda.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now(timezone.utc)
