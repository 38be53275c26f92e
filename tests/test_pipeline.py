"""Tests for the collection pipeline and end-to-end publishing."""

import copy
import json
import tempfile
from pathlib import Path

from docdata.config import PublishConfig
from docdata.pipeline import build_documentation_set, publish
from docdata.source.doclet_store import DocletStore
from docdata.writer import generated_banner


def _doclets() -> list[dict]:
    """A small doclet dump covering every entity kind."""
    return [
        {
            "longname": "Meteor",
            "kind": "namespace",
            "summary": "The Meteor namespace",
            "comment": "/** ... */",
            "meta": {"path": "/repo/packages/meteor", "filename": "client_environment.js", "lineno": 1},
            "___id": "T000002R000001",
            "___s": True,
        },
        {
            "longname": "Hidden",
            "kind": "namespace",
            "meta": {"path": "/repo/packages/hidden", "filename": "hidden.js", "lineno": 1},
        },
        {
            "longname": "Meteor.isClient",
            "kind": "member",
            "summary": "Boolean variable. True if running in client environment.",
            "tags": [{"title": "locus", "value": "Anywhere"}],
            "meta": {"path": "/repo/packages/meteor", "filename": "client_environment.js", "lineno": 12},
        },
        {
            "longname": "Meteor.undocumentedFlag",
            "kind": "member",
            "meta": {"path": "/repo/packages/meteor", "filename": "flags.js", "lineno": 3},
        },
        {
            "longname": "Meteor~callCallback",
            "kind": "typedef",
            "comment": "/** @callback */",
            "params": [{"name": "error"}, {"name": "result"}],
            "meta": {"path": "/repo/packages/ddp-client", "filename": "livedata.js", "lineno": 30},
        },
        {
            "longname": "Meteor.call",
            "kind": "function",
            "summary": "Invokes a method.",
            "params": [{"name": "name"}, {"name": "options.wait|noRetry"}, {"name": "options.onResult"}],
            "tags": [{"title": "importfrompackage", "value": "meteor"}],
            "meta": {"path": "/repo/packages/ddp-client", "filename": "livedata.js", "lineno": 44},
        },
        {
            "longname": "Meteor.secret",
            "kind": "function",
            "params": [{"name": "options.x"}],
            "meta": {"path": "/repo/packages/meteor", "filename": "secret.js", "lineno": 5},
        },
        {
            "longname": "Mongo.Collection",
            "kind": "class",
            "summary": "Constructor for a Collection",
            "meta": {"path": "/repo/packages/mongo", "filename": "collection.js", "lineno": 20},
        },
        {
            "longname": "Mongo.Collection#find",
            "kind": "function",
            "summary": "Find documents.",
            "undocumented": True,
        },
        {
            "longname": "Mongo.Collection#_private",
            "kind": "function",
            "summary": "Internal.",
            "access": "private",
        },
        {
            "longname": "<anonymous>~inner",
            "kind": "function",
            "summary": "Anonymous inner.",
            "memberof": "<anonymous>",
        },
    ]


def _build(records=None, config=None):
    store = DocletStore.from_records(records if records is not None else _doclets())
    return build_documentation_set(store.prune(), config)


def test_documented_only_filtering():
    doc_set = _build()
    assert "Meteor" in doc_set
    assert "Hidden" not in doc_set
    assert "Meteor.isClient" in doc_set
    assert "Meteor.undocumentedFlag" not in doc_set
    assert "Meteor.secret" not in doc_set
    assert "Mongo.Collection" in doc_set


def test_typedef_included_without_summary():
    doc_set = _build()
    typedef = doc_set.get("Meteor~callCallback")
    assert typedef is not None
    output = typedef.to_dict()
    assert "comment" not in output
    # Typedef params are not split into options
    assert output["params"] == [{"name": "error"}, {"name": "result"}]
    assert "options" not in output
    assert output["module"] == "ddp-client"


def test_function_params_and_options():
    output = _build().get("Meteor.call").to_dict()
    assert output["params"] == [{"name": "name"}]
    assert output["options"] == [{"name": "wait, noRetry"}, {"name": "onResult"}]
    assert output["module"] == "meteor"
    assert output["filepath"] == "ddp-client/livedata.js"
    assert output["lineno"] == 44


def test_class_gets_empty_params_and_options():
    output = _build().get("Mongo.Collection").to_dict()
    assert output["params"] == []
    assert output["options"] == []
    assert output["module"] == "mongo"


def test_pruned_records_excluded():
    doc_set = _build()
    assert "Mongo.Collection#find" not in doc_set
    assert "Mongo.Collection#_private" not in doc_set
    assert "<anonymous>~inner" not in doc_set


def test_private_records_kept_when_configured():
    store = DocletStore.from_records(_doclets())
    config = PublishConfig(include_private=True)
    doc_set = build_documentation_set(store.prune(include_private=True), config)
    assert "Mongo.Collection#_private" in doc_set


def test_names_match_map_keys():
    doc_set = _build()
    names = doc_set.names
    assert names == sorted(names)
    assert len(names) == len(set(names))
    assert set(names) == set(doc_set.to_dict())


def test_later_kind_wins_on_name_collision():
    records = [
        {"longname": "Dup", "kind": "member", "summary": "A member"},
        {"longname": "Dup", "kind": "function", "summary": "A function"},
        {"longname": "Dup", "kind": "namespace", "summary": "A namespace"},
    ]
    doc_set = _build(records)
    assert doc_set.get("Dup").kind == "function"
    assert doc_set.names == ["Dup"]


def test_build_does_not_mutate_source():
    records = _doclets()
    original = copy.deepcopy(records)
    _build(records)
    _build(records)
    assert records == original


def test_stripped_fields_absent_everywhere():
    for output in _build().to_dict().values():
        for key in ("comment", "tags", "meta", "___id", "___s"):
            assert key not in output


def test_publish_writes_both_artifacts():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = PublishConfig(
            data_path=str(Path(tmpdir) / "data.js"),
            names_path=str(Path(tmpdir) / "names.json"),
        )
        doc_set = publish(DocletStore.from_records(_doclets()), config)

        data_text = Path(config.data_path).read_text(encoding="utf-8")
        names = json.loads(Path(config.names_path).read_text(encoding="utf-8"))

        assert data_text.split("\n", 1)[0] == generated_banner()
        assert names == doc_set.names

        body = data_text.split("\n", 1)[1]
        assert body.startswith("module.exports = ")
        assert body.endswith(";")
        data = json.loads(body[len("module.exports = "):-1])
        assert sorted(data) == names


def test_publish_is_idempotent():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = PublishConfig(
            data_path=str(Path(tmpdir) / "data.js"),
            names_path=str(Path(tmpdir) / "names.json"),
        )
        store = DocletStore.from_records(_doclets())

        publish(store, config)
        first = (Path(config.data_path).read_bytes(), Path(config.names_path).read_bytes())

        publish(store, config)
        second = (Path(config.data_path).read_bytes(), Path(config.names_path).read_bytes())

        assert first == second

        # Input order must not matter either
        publish(DocletStore.from_records(list(reversed(_doclets()))), config)
        third = (Path(config.data_path).read_bytes(), Path(config.names_path).read_bytes())
        assert first == third
