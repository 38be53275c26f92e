"""Tag dictionary — custom doc tags (``@importfrompackage`` etc.) as fields."""

from __future__ import annotations

from typing import Any


def get_tag_dict(record: dict) -> dict[str, Any]:
    """Map each tag title on the record to its value.

    Later tags win over earlier ones with the same title. A tag with no
    value maps to None.
    """
    tag_dict: dict[str, Any] = {}
    for tag in record.get("tags") or []:
        tag_dict[tag["title"]] = tag.get("value")
    return tag_dict
