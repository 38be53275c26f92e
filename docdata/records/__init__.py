"""Records — the normalization rules applied to each parsed doc record.

- Tags: custom tag titles and values lifted to top-level fields
- Options: ``options.*`` parameters grouped apart from plain parameters
- Normalizer: bookkeeping removed, module/filepath/lineno derived
"""

from docdata.records.models import DocumentationSet, EntityKind, NormalizedRecord
from docdata.records.normalizer import normalize_record
from docdata.records.options import split_option_params
from docdata.records.tags import get_tag_dict

__all__ = [
    "DocumentationSet",
    "EntityKind",
    "NormalizedRecord",
    "get_tag_dict",
    "normalize_record",
    "split_option_params",
]
