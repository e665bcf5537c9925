"""Catalog session: holds the current catalog and swaps it atomically on reload."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from application.constants import IN_MEMORY_SOURCE
from domain.catalog import AdapterSettings, VerbCatalog, build_catalog
from infrastructure.io import read_document
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


class CatalogSession:
    """
    Owner of the catalog currently in use.

    A load builds a complete new VerbCatalog before replacing the reference, so
    callers see either the previous catalog or the new one, never a mix. If the
    load fails, the previous catalog stays in place and the error propagates.
    """

    def __init__(self, settings: AdapterSettings | None = None) -> None:
        self._settings = settings or AdapterSettings()
        self._catalog: VerbCatalog | None = None
        self._loads = 0

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    @property
    def catalog(self) -> VerbCatalog:
        if self._catalog is None:
            raise RuntimeError("No catalog loaded; call load() or load_file() first")
        return self._catalog

    def load(self, raw: Any, *, source: str = IN_MEMORY_SOURCE) -> VerbCatalog:
        """Build a catalog from a parsed document and make it current."""
        load_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{self._loads + 1}_{source}"
        set_log_context(load_id_full=load_id, source=source)

        catalog = build_catalog(raw, self._settings)

        previous = self._catalog
        self._catalog = catalog
        self._loads += 1
        logger.info(
            "%s catalog from %s: %d levels, %d formats, %d verb entries",
            "Reloaded" if previous is not None else "Loaded",
            source,
            len(catalog.taxonomy.levels),
            len(catalog.formats.formats),
            len(catalog.verbs),
        )
        return catalog

    def load_file(self, path: Path) -> VerbCatalog:
        """Read a verbs document from disk, then load it."""
        raw = read_document(path)
        return self.load(raw, source=str(path))
