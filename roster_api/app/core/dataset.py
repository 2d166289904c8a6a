"""
Access to the on‑disk roster file.

The roster is a single JSON document whose top level is expected to
be an array of unit objects.  ``DatasetLoader`` re-reads and re-parses
the file on every call; there is no cache and no change detection, so
edits to the file are visible on the next request.

The read itself is blocking, so it is pushed to a worker thread with
``asyncio.to_thread`` to keep the event loop free for other requests.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from .errors import DatasetLoadError

logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON number: {token}")


class DatasetLoader:
    """Load the JSON roster from a fixed path."""

    def __init__(self, path: str) -> None:
        self.path = path

    def _read(self) -> Any:
        text = Path(self.path).read_text(encoding="utf-8")
        return json.loads(text, parse_constant=_reject_constant)

    async def load(self) -> Any:
        """Read and parse the dataset file.

        Returns
        -------
        Any
            The parsed JSON value.  Callers decide what to do when the
            top level is not an array.

        Raises
        ------
        DatasetLoadError
            If the file cannot be read or does not contain valid JSON.
        """
        logger.debug("Loading dataset from %s", self.path)
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueError
            logger.warning("Could not load %s: %s", self.path, exc)
            raise DatasetLoadError(self.path, str(exc)) from exc
