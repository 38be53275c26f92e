"""Record data models — the normalized form written to the data assets.

Raw records come from the parser as plain dicts. The normalizer turns each
one into a NormalizedRecord, and the pipeline collects those into a
DocumentationSet keyed by longname.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Key used for records that reach the set without a longname
UNDEFINED_NAME = "undefined"


class EntityKind(Enum):
    NAMESPACE = "namespace"
    MEMBER = "member"
    TYPEDEF = "typedef"
    FUNCTION = "function"
    CLASS = "class"


@dataclass
class NormalizedRecord:
    """A documentation record after tag merging and field cleanup.

    Known and derived fields are explicit attributes. Everything else the
    parser or a custom tag supplied lives in ``fields``.
    """

    longname: str | None = None
    kind: str | None = None

    # Derived
    module: str | None = None
    filepath: str | None = None
    lineno: int | None = None

    # Functions/classes only; None means "not emitted"
    params: list[dict] | None = None
    options: list[dict] | None = None

    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def entity_kind(self) -> EntityKind | None:
        try:
            return EntityKind(self.kind)
        except ValueError:
            return None

    @property
    def summary(self) -> Any:
        return self.fields.get("summary")

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the mapping written to the data module."""
        data = dict(self.fields)
        for key in ("longname", "kind", "module", "filepath", "lineno", "params", "options"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class DocumentationSet:
    """All normalized records of one run, keyed by longname."""

    records: dict[str, NormalizedRecord] = field(default_factory=dict)

    def add(self, record: NormalizedRecord) -> None:
        key = record.longname
        if key is None:
            logger.warning(
                "Record of kind %r has no longname; storing it under %r",
                record.kind,
                UNDEFINED_NAME,
            )
            key = UNDEFINED_NAME
        self.records[key] = record

    @property
    def names(self) -> list[str]:
        return sorted(self.records)

    def get(self, longname: str) -> NormalizedRecord | None:
        return self.records.get(longname)

    def count_by_kind(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for record in self.records.values():
            kind = record.kind or "unknown"
            counts[kind] = counts.get(kind, 0) + 1
        return counts

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: record.to_dict() for name, record in self.records.items()}

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, longname: object) -> bool:
        return longname in self.records
