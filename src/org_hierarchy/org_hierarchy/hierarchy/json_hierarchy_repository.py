from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from ..core.exceptions import ValidationError
from .mapper import snapshot_from_doc
from .model import HierarchySnapshot
from .repository import HierarchyDataSource

logger = logging.getLogger(__name__)


class JsonFileHierarchyRepository(HierarchyDataSource):
    """Reads a saved org-hierarchy response document from disk.

    The file is re-read on every fetch. A missing file raises OSError; a file
    that is not a valid document raises ValidationError.
    """

    def __init__(self, path: str | Path, *, organization: Optional[str] = None):
        self._path = Path(path)
        self._organization = organization

    def fetch(self) -> HierarchySnapshot:
        try:
            doc = json.loads(self._path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValidationError(f"Invalid hierarchy document {self._path.name}: {e}") from e

        # the body may be wrapped as {"success": true, "data": {...}}
        if isinstance(doc, dict) and "data" in doc and isinstance(doc["data"], dict):
            doc = doc["data"]

        snapshot = snapshot_from_doc(doc)
        logger.debug("Loaded %d employees from %s", len(snapshot.employees), self._path)
        if snapshot.organization is None and self._organization:
            return HierarchySnapshot(
                employees=snapshot.employees,
                hierarchy=snapshot.hierarchy,
                organization=self._organization,
                total_employees=snapshot.total_employees,
            )
        return snapshot
