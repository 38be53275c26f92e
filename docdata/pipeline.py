"""Collection pipeline — pulls each entity kind from the store and normalizes it.

Every kind shares the same normalization step. They differ only in whether
an undocumented record (no ``summary``) is skipped and whether the parameter
list is split into params and options, which KIND_RULES captures.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass

from docdata.config import PublishConfig
from docdata.records.models import DocumentationSet, EntityKind
from docdata.records.normalizer import normalize_record
from docdata.records.options import split_option_params
from docdata.source.doclet_store import DocletStore
from docdata.writer import write_artifacts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KindRule:
    requires_summary: bool = True
    splits_options: bool = False


KIND_RULES: dict[EntityKind, KindRule] = {
    EntityKind.NAMESPACE: KindRule(),
    EntityKind.MEMBER: KindRule(),
    # Typedefs (callbacks mostly) are referenced from documented functions,
    # so they are kept even without a summary.
    EntityKind.TYPEDEF: KindRule(requires_summary=False),
    EntityKind.FUNCTION: KindRule(splits_options=True),
    EntityKind.CLASS: KindRule(splits_options=True),
}

# Functions and classes are one group: all functions, then all classes.
PROCESSING_ORDER: list[tuple[EntityKind, ...]] = [
    (EntityKind.NAMESPACE,),
    (EntityKind.MEMBER,),
    (EntityKind.TYPEDEF,),
    (EntityKind.FUNCTION, EntityKind.CLASS),
]


def build_documentation_set(
    store: DocletStore, config: PublishConfig | None = None
) -> DocumentationSet:
    """Normalize every documented record in an already-pruned store.

    Records in the store are left untouched, so the same store can be built
    any number of times with identical results.
    """
    config = config or PublishConfig()
    doc_set = DocumentationSet()

    for group in PROCESSING_ORDER:
        for kind in group:
            rule = KIND_RULES[kind]
            added = skipped = 0
            for raw in store.find(kind=kind.value):
                if rule.requires_summary and not raw.get("summary"):
                    skipped += 1
                    continue
                data = copy.deepcopy(raw)
                if rule.splits_options:
                    data["params"], data["options"] = split_option_params(data.get("params"))
                doc_set.add(normalize_record(data, config.package_marker))
                added += 1
            logger.debug("%s: %d added, %d undocumented skipped", kind.value, added, skipped)

    logger.info("Built documentation set with %d entries", len(doc_set))
    return doc_set


def publish(store: DocletStore, config: PublishConfig | None = None) -> DocumentationSet:
    """Prune the store, build the documentation set and write both assets."""
    config = config or PublishConfig()
    doc_set = build_documentation_set(store.prune(include_private=config.include_private), config)
    write_artifacts(
        doc_set,
        data_path=config.data_path,
        names_path=config.names_path,
        regenerate_command=config.regenerate_command,
    )
    return doc_set
