"""
Unit tests for TreeProjector: bounded default tree, truncation markers,
search ordering/grouping and the distinct empty states.
"""

import pytest

from tree_projector import (
    MAX_DEPTH,
    STATUS_MESSAGES,
    NodeKind,
    NodeState,
    TreeProjector,
    TreeStatus,
    more_label,
)
from word_store import StubEntry, WordStore


def _node(view, label):
    return next(node for node in view.walk() if node.label == label)


@pytest.mark.unit
def test_bolt_scenario_default_tree(bolt_store):
    view = TreeProjector(bolt_store).project()

    assert view.status is TreeStatus.TREE
    assert [node.label for node in view.nodes] == ["Bolt"]
    assert [child.label for child in view.nodes[0].children] == ["Hex Bolt"]
    assert view.nodes[0].children[0].depth == 1


@pytest.mark.unit
def test_default_tree_never_shows_fourth_level(deep_store):
    view = TreeProjector(deep_store).project()

    assert "Hex Bolt" not in view.labels()
    assert max(node.depth for node in view.walk()) == MAX_DEPTH - 1
    assert _node(view, "Bolt").children == ()


@pytest.mark.unit
def test_level_two_list_is_truncated_with_remainder_marker(deep_store):
    view = TreeProjector(deep_store).project()
    fasteners = _node(view, "Fasteners")

    labels = [child.label for child in fasteners.children]
    assert labels == ["Bolt", "Nail", "Rivet", more_label(2)]
    assert labels[-1] == "+2 more…"

    marker = fasteners.children[-1]
    assert marker.kind is NodeKind.MORE
    assert not marker.interactive
    assert marker.entry is None


@pytest.mark.unit
def test_level_one_lists_are_not_truncated():
    records = [{"word": "Top", "parent": "root"}]
    records += [{"word": f"Child {idx}", "parent": "Top"} for idx in range(6)]
    view = TreeProjector(WordStore(records)).project()

    assert len(view.nodes[0].children) == 6
    assert all(child.kind is NodeKind.WORD for child in view.nodes[0].children)


@pytest.mark.unit
def test_exactly_three_level_two_children_get_no_marker():
    records = [{"word": "Top", "parent": "root"}, {"word": "Mid", "parent": "Top"}]
    records += [{"word": f"Leaf {idx}", "parent": "Mid"} for idx in range(3)]
    view = TreeProjector(WordStore(records)).project()

    leaves = _node(view, "Mid").children
    assert [leaf.label for leaf in leaves] == ["Leaf 0", "Leaf 1", "Leaf 2"]


@pytest.mark.unit
def test_cyclic_parent_chain_stays_bounded():
    # Second "Loop" entry points back down the chain
    store = WordStore([
        {"word": "Loop", "parent": "root"},
        {"word": "Step", "parent": "Loop"},
        {"word": "Loop", "parent": "Step"},
    ])
    view = TreeProjector(store).project()

    assert view.labels() == ["Loop", "Step", "Loop"]


@pytest.mark.unit
def test_active_node_is_marked(bolt_store):
    hex_bolt = bolt_store.find("hex bolt")
    view = TreeProjector(bolt_store).project(active=hex_bolt)

    assert _node(view, "Hex Bolt").active
    assert not _node(view, "Bolt").active


@pytest.mark.unit
def test_empty_states_are_distinct():
    empty = TreeProjector(WordStore([])).project()
    no_roots = TreeProjector(WordStore([{"word": "Orphan", "parent": "Nowhere"}])).project()
    no_results = TreeProjector(WordStore([{"word": "Bolt", "parent": "root"}])).project("zzz")

    assert empty.status is TreeStatus.NO_DATA
    assert no_roots.status is TreeStatus.NO_ROOTS
    assert no_results.status is TreeStatus.NO_RESULTS
    assert len({empty.message, no_roots.message, no_results.message}) == 3
    assert not any(view.populated for view in (empty, no_roots, no_results))


@pytest.mark.unit
def test_empty_record_set_reports_no_data_even_when_searching():
    assert TreeProjector(WordStore([])).project("bolt").status is TreeStatus.NO_DATA


@pytest.mark.unit
def test_every_status_has_a_message():
    for status in TreeStatus:
        if status in (TreeStatus.TREE, TreeStatus.SEARCH):
            continue
        assert STATUS_MESSAGES[status]


@pytest.mark.unit
def test_search_prefix_matches_sort_before_substring_matches():
    store = WordStore([
        {"word": "indicator", "parent": "root"},
        {"word": "scatter", "parent": "root"},
        {"word": "category", "parent": "root"},
        {"word": "Catalog", "parent": "root"},
        {"word": "dog", "parent": "root"},
    ])
    view = TreeProjector(store).project("cat")

    assert view.status is TreeStatus.SEARCH
    assert view.labels() == ["Catalog", "category", "indicator", "scatter"]
    assert view.match_count == 4


@pytest.mark.unit
def test_search_groups_matches_under_parent_header(deep_store):
    view = TreeProjector(deep_store).project("bolt")

    assert [node.label for node in view.nodes] == ["Fasteners", "Bolt"]

    fasteners = view.nodes[0]
    assert fasteners.kind is NodeKind.HEADER
    assert fasteners.state is NodeState.HIDDEN
    assert [child.label for child in fasteners.children] == ["Bolt"]
    assert fasteners.children[0].state is NodeState.FOCUS

    # "Hex Bolt" is grouped under its parent "Bolt", which itself matches
    bolt_header = view.nodes[1]
    assert bolt_header.state is NodeState.FOCUS
    assert [child.label for child in bolt_header.children] == ["Hex Bolt"]
    assert view.match_count == 2


@pytest.mark.unit
def test_search_header_for_dangling_parent_is_a_stub():
    store = WordStore([{"word": "Lock Washer", "parent": "Washers", "definition": "Springy"}])
    view = TreeProjector(store).project("lock")

    header = view.nodes[0]
    assert isinstance(header.entry, StubEntry)
    assert header.label == "Washers"
    assert header.state is NodeState.HIDDEN
    assert header.children[0].label == "Lock Washer"


@pytest.mark.unit
def test_search_root_level_matches_have_no_header(bolt_store):
    view = TreeProjector(bolt_store).project("bolt")

    top = view.nodes[0]
    assert top.label == "Bolt"
    assert top.kind is NodeKind.WORD
    assert top.state is NodeState.FOCUS
    assert view.nodes[1].kind is NodeKind.HEADER
    assert view.nodes[1].children[0].label == "Hex Bolt"


@pytest.mark.unit
def test_search_tolerates_nul_character_in_word():
    store = WordStore([
        {"word": "cat\x00nip", "parent": "root"},
        {"word": "catalog", "parent": "root"},
        {"word": "scatter", "parent": "root"},
    ])
    view = TreeProjector(store).project("cat")

    assert view.status is TreeStatus.SEARCH
    assert view.labels() == ["catalog", "cat\x00nip", "scatter"]
