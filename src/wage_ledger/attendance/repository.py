from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceSnapshot(Protocol):
    """Read side owned by the data-sync layer."""

    def list_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class AttendanceWriter(Protocol):
    async def update_one(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist one record; raise on failure."""

        raise NotImplementedError
