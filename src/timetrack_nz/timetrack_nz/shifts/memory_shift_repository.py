from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Any, Iterable, Mapping, Optional, Sequence

from .documents import shift_from_document
from .model import Shift

logger = logging.getLogger(__name__)


class InMemoryShiftRepository:
    """ShiftRepository over shifts already fetched from the store."""

    def __init__(
        self,
        shifts: Iterable[Shift] = (),
        *,
        documents: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self._shifts: dict[str, Shift] = {s.shift_id: s for s in shifts}
        # Raw documents are kept so the repository can be re-keyed to the company zone.
        self._documents = dict(documents) if documents is not None else None

    @classmethod
    def from_documents(
        cls,
        documents: Mapping[str, Mapping[str, Any]],
        *,
        tz: Optional[tzinfo] = None,
    ) -> "InMemoryShiftRepository":
        shifts = [shift_from_document(shift_id, doc, tz) for shift_id, doc in documents.items()]
        logger.debug("Loaded %s shift documents", len(shifts))
        return cls(shifts, documents=documents)

    def with_timezone(self, tz: tzinfo) -> "InMemoryShiftRepository":
        """Re-map the stored documents so aware timestamps land on ``tz`` wall-clock dates."""
        if self._documents is None:
            return self
        rekeyed = InMemoryShiftRepository.from_documents(self._documents, tz=tz)
        for shift_id, shift in self._shifts.items():
            if shift_id not in self._documents:
                rekeyed.add(shift)
        return rekeyed

    def add(self, shift: Shift) -> None:
        self._shifts[shift.shift_id] = shift

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        return self._shifts.get(shift_id)

    def list_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
    ) -> Sequence[Shift]:
        items = [
            s
            for s in self._shifts.values()
            if start_date <= s.clock_in.date() <= end_date and (user_id is None or s.user_id == user_id)
        ]
        items.sort(key=lambda s: s.clock_in)
        return items
