"""Doclet store — the parser output as a queryable list of raw records.

The parser (``jsdoc -X``) dumps every doclet it found as a JSON array. The
store loads that array, drops the records no template should see, and
answers attribute-equality queries such as ``find(kind="function")``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from docdata.errors import SourceLoadError

logger = logging.getLogger(__name__)

ANONYMOUS_MEMBEROF = "<anonymous>"


class DocletStore:
    """In-memory collection of raw doc records."""

    def __init__(self, records: list[dict[str, Any]] | None = None):
        self._records: list[dict[str, Any]] = list(records or [])

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> DocletStore:
        return cls(records)

    @classmethod
    def from_file(cls, path: str | Path) -> DocletStore:
        """Load a JSON array of doclets from disk."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SourceLoadError(f"Cannot read parser output {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SourceLoadError(f"Parser output {path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise SourceLoadError(
                f"Parser output {path} must be a JSON array, got {type(data).__name__}"
            )
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise SourceLoadError(
                    f"Parser output {path}: item {i} is {type(item).__name__}, expected an object"
                )

        logger.debug("Loaded %d doclets from %s", len(data), path)
        return cls(data)

    def find(self, **attrs: Any) -> list[dict[str, Any]]:
        """Return records whose attributes equal every value in ``attrs``."""
        results = []
        for record in self._records:
            if all(record.get(key) == value for key, value in attrs.items()):
                results.append(record)
        return results

    def prune(self, include_private: bool = False) -> DocletStore:
        """Return a new store without undocumented, ignored or anonymous records.

        Private records are dropped too unless ``include_private`` is set.
        """
        kept = []
        for record in self._records:
            if record.get("undocumented") is True or record.get("ignore") is True:
                continue
            if record.get("memberof") == ANONYMOUS_MEMBEROF:
                continue
            if not include_private and record.get("access") == "private":
                continue
            kept.append(record)

        logger.debug("Pruned %d of %d doclets", len(self._records) - len(kept), len(self._records))
        return DocletStore(kept)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)
