"""
In‑memory record storage seeded from static JSON datasets.

Every entity type lives in its own ``RecordStore``: an ordered list of
pydantic records with no persistence beyond the running process.  The
stores are created by ``init_store`` (called on application startup
and by the test suite to reset state) from the JSON files in
``settings.data_dir``.  ``get_store`` seeds lazily so services can be
used outside the ASGI application as well.

This module also provides ``simulate_latency`` which services await
before touching a store to emulate the round trip of a real backend.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, get_args

from pydantic import BaseModel

from .config import settings
from ..schemas.app import AppRead
from ..schemas.log_entry import LogEntryRead
from ..schemas.sales_comment import SalesCommentRead
from ..schemas.user_analytics import UserAnalyticsRead


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Store name -> (seed file, record model)
DATASETS: Dict[str, Tuple[str, Type[BaseModel]]] = {
    "apps": ("apps.json", AppRead),
    "user_analytics": ("userAnalytics.json", UserAnalyticsRead),
    "log_entries": ("logEntries.json", LogEntryRead),
    "sales_comments": ("salesComments.json", SalesCommentRead),
}


class RecordStore(Generic[RecordT]):
    """Ordered in‑memory sequence of records keyed by an integer ``id``.

    Records handed out by the store are deep copies, so callers may
    mutate them freely without affecting stored state.  Identifier
    uniqueness is not enforced; lookups return the first match.
    """

    def __init__(self, name: str, records: Optional[List[RecordT]] = None) -> None:
        self.name = name
        self._records: List[RecordT] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[RecordT]:
        return [record.model_copy(deep=True) for record in self._records]

    def get(self, record_id: int) -> Optional[RecordT]:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._records[index].model_copy(deep=True)

    def next_id(self) -> int:
        """Return one more than the highest stored identifier (1 when empty)."""
        return max((record.id for record in self._records), default=0) + 1

    def add(self, record: RecordT) -> RecordT:
        self._records.append(record.model_copy(deep=True))
        return record.model_copy(deep=True)

    def replace(self, record: RecordT) -> bool:
        index = self._index_of(record.id)
        if index is None:
            return False
        self._records[index] = record.model_copy(deep=True)
        return True

    def remove(self, record_id: int) -> Optional[RecordT]:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._records.pop(index)

    def _index_of(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None


def _nullable(model: Type[BaseModel], name: str) -> bool:
    field = model.model_fields.get(name)
    return field is not None and type(None) in get_args(field.annotation)


def apply_patch(record: RecordT, patch: BaseModel, **extra: Any) -> RecordT:
    """Return a copy of ``record`` with the fields set on ``patch`` merged in.

    Only fields present in the patch are applied.  An explicit ``null``
    clears a nullable field such as ``metadata`` or ``followUpDate``
    and is ignored for fields every record must carry.  ``extra``
    values are applied last.
    """
    changes = {
        name: value
        for name, value in patch.model_dump(exclude_unset=True).items()
        if value is not None or _nullable(type(record), name)
    }
    changes.update(extra)
    return record.model_copy(update=changes)


_stores: Dict[str, RecordStore] = {}


def load_dataset(path: Path, model: Type[RecordT]) -> List[RecordT]:
    """Read a JSON array from ``path`` and validate each item as ``model``."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    return [model.model_validate(item) for item in raw]


def init_store(data_dir: Optional[str] = None) -> None:
    """(Re)create every store from the seed datasets.

    Any in‑memory mutation made since the previous initialisation is
    discarded.  A missing seed file yields an empty store.
    """
    base_dir = Path(data_dir or settings.data_dir)
    _stores.clear()
    for name, (filename, model) in DATASETS.items():
        path = base_dir / filename
        if path.exists():
            records = load_dataset(path, model)
        else:
            logger.warning("Seed file %s not found, starting %s empty", path, name)
            records = []
        _stores[name] = RecordStore(name, records)
        logger.info("Loaded %d %s records", len(records), name)


def get_store(name: str) -> RecordStore:
    """Return the store for ``name``, seeding all stores on first use."""
    if not _stores:
        init_store()
    return _stores[name]


async def simulate_latency(milliseconds: int) -> None:
    """Sleep for ``milliseconds`` scaled by ``settings.latency_scale``."""
    delay = milliseconds * settings.latency_scale / 1000
    if delay > 0:
        await asyncio.sleep(delay)
