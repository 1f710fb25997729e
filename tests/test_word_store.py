"""
Unit tests for WordStore: parsing, indices, lookups and atomic reloads.
"""

from unittest.mock import patch

import pytest

from network import FetchError
from word_store import ROOT, StubEntry, WordEntry, WordStore, parse_entry


@pytest.mark.unit
def test_children_of_root_returns_root_entries_in_source_order():
    store = WordStore([
        {"word": "Zeta", "parent": "root", "definition": ""},
        {"word": "Child", "parent": "Zeta", "definition": ""},
        {"word": "Alpha", "parent": "root", "definition": ""},
        {"word": "Loose", "parent": "Root", "definition": ""},
    ])

    assert [entry.word for entry in store.children_of(ROOT)] == ["Zeta", "Alpha"]


@pytest.mark.unit
def test_children_of_matches_parent_case_sensitively(bolt_store):
    assert [entry.word for entry in bolt_store.children_of("Bolt")] == ["Hex Bolt"]
    assert bolt_store.children_of("bolt") == ()
    assert bolt_store.children_of("Nothing") == ()


@pytest.mark.unit
def test_find_is_case_insensitive(bolt_store):
    assert bolt_store.find("hex bolt").word == "Hex Bolt"
    assert bolt_store.find("BOLT").definition == "A fastener"
    assert bolt_store.find("Unknown") is None
    assert bolt_store.find("") is None
    assert bolt_store.find(None) is None


@pytest.mark.unit
def test_find_prefers_first_entry_on_case_collision():
    store = WordStore([
        {"word": "Nut", "parent": "root", "definition": "first"},
        {"word": "NUT", "parent": "root", "definition": "second"},
    ])

    assert store.find("nut").definition == "first"
    # Both stay visible in the tree even though only one is reachable by lookup
    assert len(store.children_of(ROOT)) == 2


@pytest.mark.unit
def test_resolve_returns_stub_for_dangling_parent(bolt_store):
    assert bolt_store.resolve("bolt") == bolt_store.find("Bolt")

    stub = bolt_store.resolve("Machine Parts")
    assert isinstance(stub, StubEntry)
    assert stub.word == "Machine Parts"
    assert stub.is_stub


@pytest.mark.unit
def test_parse_entry_guards_malformed_items():
    assert parse_entry("not a dict") is None
    assert parse_entry({"definition": "no word"}) is None
    assert parse_entry({"word": 42}) is None

    entry = parse_entry({"word": "Washer", "tags": ["a", 3, "b"], "parent": 7})
    assert entry == WordEntry(word="Washer", definition="", tags=("a", "b"), parent=None)

    entry = parse_entry({"word": "Shim", "definition": "Thin", "tags": "flat", "parent": "root"})
    assert entry.tags == ()
    assert entry.parent == "root"


@pytest.mark.unit
def test_replace_skips_malformed_items_and_keeps_order():
    store = WordStore()

    records = store.replace([{"word": "A", "parent": "root"}, None, {"word": "B", "parent": "root"}])

    assert [entry.word for entry in records] == ["A", "B"]
    assert len(store) == 2


@pytest.mark.unit
def test_empty_store_reports_empty():
    store = WordStore([])
    assert store.is_empty
    assert store.children_of(ROOT) == ()


@pytest.mark.unit
def test_load_replaces_records_from_fetched_document():
    store = WordStore([{"word": "Old", "parent": "root"}])

    with patch("word_store.fetch_glossary", return_value=[{"word": "New", "parent": "root"}]) as fetch:
        records = store.load("https://example.test/dictionary.json", timeout=3)

    fetch.assert_called_once_with("https://example.test/dictionary.json", timeout=3)
    assert [entry.word for entry in records] == ["New"]
    assert store.find("old") is None
    assert store.find("new") is not None


@pytest.mark.unit
def test_load_failure_leaves_previous_records_untouched():
    store = WordStore([{"word": "Old", "parent": "root"}])
    error = FetchError("HTTP error! status: 500", url="u")

    with patch("word_store.fetch_glossary", side_effect=error):
        with pytest.raises(FetchError):
            store.load("u")

    assert [entry.word for entry in store.records] == ["Old"]
