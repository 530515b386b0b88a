"""Flag catalog: lookup of FlagDefinitions by id."""

from __future__ import annotations

import logging

from flagbuilder.catalog.models import FlagDefinition
from flagbuilder.catalog.nepal import NEPAL

logger = logging.getLogger(__name__)


class FlagCatalog:
    def __init__(self) -> None:
        self._flags: dict[str, FlagDefinition] = {}

    def register(self, flag: FlagDefinition) -> None:
        if flag.id in self._flags:
            raise ValueError(f"Duplicate flag id: {flag.id}")
        self._flags[flag.id] = flag
        logger.debug("Registered flag %s", flag.id)

    def get(self, flag_id: str) -> FlagDefinition | None:
        return self._flags.get(flag_id)

    def all(self) -> list[FlagDefinition]:
        return list(self._flags.values())

    @property
    def count(self) -> int:
        return len(self._flags)


# Module-level singleton
_catalog = FlagCatalog()
_catalog.register(NEPAL)


def get_catalog() -> FlagCatalog:
    return _catalog


def get_flag(flag_id: str) -> FlagDefinition | None:
    return _catalog.get(flag_id)


def all_flags() -> list[FlagDefinition]:
    return _catalog.all()
