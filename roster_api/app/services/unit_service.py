"""
Service layer for roster units.

``UnitService`` answers the two questions the API asks of the roster:
"what units exist?" and "what is the unit called X?".  Every call loads
the dataset afresh through the injected ``DatasetLoader``; the service
keeps no state of its own between calls.

Lookups compare the requested name against each entry's decoded
``name`` exactly (case-sensitive, no trimming).  Entries without a
string name decode to ``""`` and therefore match an empty query.
When several entries share a name the first one in file order wins.
"""

from __future__ import annotations

import logging
from typing import Any, List

from roster_api.app.core.dataset import DatasetLoader
from roster_api.app.core.errors import UnitNotFoundError
from roster_api.app.schemas.unit import SimpleUnit, UnitRecord

logger = logging.getLogger(__name__)


class UnitService:
    """Read-only queries over the unit roster."""

    def __init__(self, loader: DatasetLoader) -> None:
        self.loader = loader

    async def _load_entries(self) -> List[Any]:
        data = await self.loader.load()
        if not isinstance(data, list):
            logger.warning("Dataset %s is not a JSON array; treating it as empty", self.loader.path)
            return []
        return data

    async def list_units(self) -> List[SimpleUnit]:
        """Return every unit in roster order.

        Raises ``DatasetLoadError`` if the roster cannot be loaded.
        """
        entries = await self._load_entries()
        return [UnitRecord.from_raw(entry).to_simple() for entry in entries]

    async def get_unit_record(self, name: str) -> UnitRecord:
        """Return the full decoded record of the first unit called ``name``.

        Raises ``UnitNotFoundError`` when nothing matches and
        ``DatasetLoadError`` if the roster cannot be loaded.
        """
        for entry in await self._load_entries():
            record = UnitRecord.from_raw(entry)
            if record.name == name:
                return record
        raise UnitNotFoundError(name)

    async def find_unit_by_name(self, name: str) -> SimpleUnit:
        """Return the public view of the first unit called ``name``."""
        record = await self.get_unit_record(name)
        return record.to_simple()
