from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.validators import require_non_negative


@dataclass(frozen=True)
class Worker:
    """Read-only view of a worker owned by team management."""

    worker_id: str
    team_id: str
    daily_wage: Decimal
    name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "daily_wage", require_non_negative(self.daily_wage, "daily_wage"))
