"""Canonical serializer and writer for the two data assets.

Keys are sorted at every nesting level, so output depends only on content,
never on the order records were added.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from docdata.config import DEFAULT_REGENERATE_COMMAND
from docdata.records.models import DocumentationSet

logger = logging.getLogger(__name__)

BANNER_TEMPLATE = "// This file is automatically generated by JSDoc; regenerate it with {command}"


def canonical_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False)


def generated_banner(regenerate_command: str = DEFAULT_REGENERATE_COMMAND) -> str:
    return BANNER_TEMPLATE.format(command=regenerate_command)


def render_data_module(
    doc_set: DocumentationSet, regenerate_command: str = DEFAULT_REGENERATE_COMMAND
) -> str:
    """Render the name -> record map as a ``module.exports`` assignment."""
    body = "module.exports = " + canonical_json(doc_set.to_dict()) + ";"
    return generated_banner(regenerate_command) + "\n" + body


def render_names(doc_set: DocumentationSet) -> str:
    return canonical_json(doc_set.names)


def write_artifacts(
    doc_set: DocumentationSet,
    data_path: str | Path,
    names_path: str | Path,
    regenerate_command: str = DEFAULT_REGENERATE_COMMAND,
) -> None:
    """Write the data module and the name index, overwriting both.

    Both texts are rendered before either file is opened, so a record that
    cannot be serialized leaves the existing files alone. Write errors
    propagate unchanged.
    """
    data_text = render_data_module(doc_set, regenerate_command)
    names_text = render_names(doc_set)

    Path(data_path).write_text(data_text, encoding="utf-8")
    logger.info("Wrote %d records to %s", len(doc_set), data_path)

    Path(names_path).write_text(names_text, encoding="utf-8")
    logger.info("Wrote %d names to %s", len(doc_set), names_path)
