"""Record normalizer — turns a raw parser record into a NormalizedRecord.

Custom tags become top-level fields, parser bookkeeping is dropped, and the
source location is reduced to a path relative to the packages folder plus a
line number. The owning module is taken from ``@importfrompackage`` when
present, otherwise from the first segment of that path.
"""

from __future__ import annotations

from typing import Any

from docdata.records.models import NormalizedRecord
from docdata.records.tags import get_tag_dict

DEFAULT_PACKAGE_MARKER = "packages/"

# Never written to the data assets
STRIPPED_FIELDS = ("comment", "___id", "___s", "tags")


def normalize_record(
    data: dict[str, Any], package_marker: str = DEFAULT_PACKAGE_MARKER
) -> NormalizedRecord:
    """Normalize a raw record.

    The dict is consumed: fields are merged into and popped from it. Pass a
    copy if the caller needs the original intact.

    Args:
        data: One record as decoded from the parser output.
        package_marker: Path segment that precedes the package directory in
            ``meta.path``.
    """
    for title, value in get_tag_dict(data).items():
        if value is None:
            data.pop(title, None)
        else:
            data[title] = value

    for key in STRIPPED_FIELDS:
        data.pop(key, None)

    filepath = data.pop("filepath", None)
    lineno = data.pop("lineno", None)
    location = derive_location(data.pop("meta", None), package_marker, data.get("isprototype"))
    if location is not None:
        filepath, lineno = location

    data.pop("module", None)
    import_from = data.get("importfrompackage")
    if not import_from and filepath:
        module = filepath.split("/")[0]
    else:
        module = import_from

    return NormalizedRecord(
        longname=data.pop("longname", None),
        kind=data.pop("kind", None),
        module=module,
        filepath=filepath,
        lineno=lineno,
        params=data.pop("params", None),
        options=data.pop("options", None),
        fields=data,
    )


def derive_location(
    meta: Any, package_marker: str, is_prototype: Any = False
) -> tuple[str, int | None] | None:
    """Return (filepath, lineno) from a record's ``meta``, or None.

    The filepath is whatever follows the package marker in ``meta.path``,
    joined with the file name. Prototype records never get a location.
    """
    if not isinstance(meta, dict) or not meta.get("path"):
        return None

    path = meta["path"]
    index = path.find(package_marker)
    if index == -1 or is_prototype:
        return None

    filepath = path[index + len(package_marker):] + "/" + (meta.get("filename") or "")
    return filepath, meta.get("lineno")
