from __future__ import annotations

from typing import Protocol

from .model import HierarchySnapshot


class HierarchyDataSource(Protocol):
    """Repository interface for org hierarchy snapshots.

    Each fetch returns a fresh, complete snapshot. Transport failures propagate
    to the caller unchanged; retry and caching are the implementation's concern.
    """

    def fetch(self) -> HierarchySnapshot:
        raise NotImplementedError
