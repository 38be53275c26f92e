"""Source — access to the records produced by the upstream doc parser."""

from docdata.source.doclet_store import DocletStore

__all__ = ["DocletStore"]
