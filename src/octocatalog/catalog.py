"""Read-only catalog of option lists keyed by ``action_id``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import TypeAdapter, ValidationError

from octocatalog.errors import ConfigError
from octocatalog.models import CatalogEntry, Option

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[CatalogEntry])


class Catalog:
    """Immutable, ordered collection of :class:`CatalogEntry`.

    Built once at startup and shared by every request handler.  No method
    mutates the catalog, so concurrent reads need no locking.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def lookup(self, action_id: str) -> tuple[Option, ...]:
        """Return the options of the first entry whose id equals *action_id*.

        Matching is exact and case-sensitive.  An unknown id yields an empty
        tuple.
        """
        for entry in self._entries:
            if entry.action_id == action_id:
                return entry.options
        return ()

    @classmethod
    def from_json(cls, data: str | bytes) -> Catalog:
        """Parse a catalog document.  Raises :class:`ConfigError` if malformed."""
        try:
            entries = _ENTRIES.validate_json(data)
        except ValidationError as exc:
            raise ConfigError(f"parsing catalog JSON: {exc}") from exc
        return cls(entries)


def load_catalog(path: str | Path) -> Catalog:
    """Load the catalog file at *path*.

    Raises:
        ConfigError: the file cannot be read or is not a valid catalog.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"reading catalog file {path}: {exc}") from exc

    catalog = Catalog.from_json(data)
    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog
