"""
Catalog storage for the corruption engine.

The indicator list, institution trust records and case list are the only
shared mutable state in People Pulse. Stores serialize writes and hand out
copies on read, so callers never see a half-applied case.
"""

from __future__ import annotations

import copy
import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from .catalog import (
    CorruptionCase,
    CorruptionCatalog,
    CorruptionIndicator,
    DEFAULT_CATEGORY_WEIGHTS,
    InstitutionTrust,
    InternationalRanking,
    default_albania_catalog,
    normalize_key,
)

logger = logging.getLogger("peoplepulse.corruption.store")

TrustUpdate = Callable[[InstitutionTrust], None]


class CatalogStore(ABC):
    """Repository interface over a corruption catalog."""

    @abstractmethod
    def indicators(self) -> List[CorruptionIndicator]:
        """Snapshot of the indicator catalog."""

    @abstractmethod
    def institutions(self) -> List[InstitutionTrust]:
        """Snapshot of the institution trust records."""

    @abstractmethod
    def cases(self) -> List[CorruptionCase]:
        """Snapshot of the recorded cases."""

    def category_weights(self) -> Dict[str, float]:
        """Category weights for the overall index."""
        return dict(DEFAULT_CATEGORY_WEIGHTS)

    def ranking(self) -> Optional[InternationalRanking]:
        return None

    @abstractmethod
    def record_case(self, case: CorruptionCase, update: TrustUpdate) -> Optional[InstitutionTrust]:
        """
        Append a case and apply ``update`` to the institution it names.

        Both happen as one atomic step. Returns a copy of the updated
        institution, or None when no tracked institution matches.
        """


class InMemoryCatalogStore(CatalogStore):
    """Process-local store guarded by a single lock."""

    def __init__(self, catalog: Optional[CorruptionCatalog] = None):
        catalog = catalog if catalog is not None else default_albania_catalog()
        self._indicators = copy.deepcopy(catalog.indicators)
        self._institutions = copy.deepcopy(catalog.institutions)
        self._cases = copy.deepcopy(catalog.cases)
        self._category_weights = dict(catalog.category_weights)
        self._ranking = catalog.ranking
        self._lock = threading.Lock()

    def indicators(self) -> List[CorruptionIndicator]:
        with self._lock:
            return copy.deepcopy(self._indicators)

    def institutions(self) -> List[InstitutionTrust]:
        with self._lock:
            return copy.deepcopy(self._institutions)

    def cases(self) -> List[CorruptionCase]:
        with self._lock:
            return copy.deepcopy(self._cases)

    def category_weights(self) -> Dict[str, float]:
        return dict(self._category_weights)

    def ranking(self) -> Optional[InternationalRanking]:
        return self._ranking

    def record_case(self, case: CorruptionCase, update: TrustUpdate) -> Optional[InstitutionTrust]:
        key = normalize_key(case.institution)
        with self._lock:
            self._cases.append(copy.deepcopy(case))
            for institution in self._institutions:
                if institution.key == key:
                    update(institution)
                    return copy.deepcopy(institution)
        logger.debug(f"Case {case.id} names untracked institution '{case.institution}'")
        return None
