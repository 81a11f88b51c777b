"""Unit tests for the bounded ancestor climb, on a synthetic tree and on lxml."""

from serp_firewall import Document, FirewallConfig, climb, find_module_root


class Node:
    """Minimal in-memory tree node."""

    def __init__(self, name, parent=None, module=False):
        self.name = name
        self.parent = parent
        self.module = module


def chain(length, module_at=None):
    """Linear chain; returns (leaf, nodes) where nodes[0] is the leaf."""
    nodes = []
    parent = None
    for i in reversed(range(length)):
        parent = Node(f"n{i}", parent, module=(i == module_at))
        nodes.append(parent)
    nodes.reverse()
    return nodes[0], nodes


def parent_of(node):
    return node.parent


class TestClimb:
    """Tree-agnostic search semantics."""

    def test_finds_first_predicate_match(self):
        leaf, nodes = chain(6, module_at=3)
        assert climb(leaf, lambda n: n.module, 18, parent=parent_of) is nodes[3]

    def test_start_node_is_inspected(self):
        leaf, _ = chain(3, module_at=0)
        assert climb(leaf, lambda n: n.module, 18, parent=parent_of) is leaf

    def test_boundary_child_wins_over_predicate(self):
        leaf, nodes = chain(5, module_at=3)
        # nodes[2] sits directly under the boundary nodes[3]
        assert climb(leaf, lambda n: n.module, 18, boundary=nodes[3], parent=parent_of) is nodes[2]

    def test_chain_end_returns_none(self):
        leaf, _ = chain(4)
        assert climb(leaf, lambda n: n.module, 18, parent=parent_of) is None

    def test_none_start(self):
        assert climb(None, lambda n: True, 18, parent=parent_of) is None

    def test_never_inspects_more_than_max_depth(self):
        leaf, _ = chain(40)
        seen = []

        def predicate(n):
            seen.append(n)
            return False

        assert climb(leaf, predicate, 18, parent=parent_of) is None
        assert len(seen) == 18

    def test_match_at_last_allowed_depth(self):
        leaf, nodes = chain(30, module_at=17)
        assert climb(leaf, lambda n: n.module, 18, parent=parent_of) is nodes[17]

    def test_match_beyond_depth_is_not_found(self):
        leaf, _ = chain(30, module_at=18)
        assert climb(leaf, lambda n: n.module, 18, parent=parent_of) is None


class TestFindModuleRoot:
    """Climb on the lxml tree with the structural boundary attributes."""

    def test_stops_at_boundary_attribute(self, serp_doc):
        span = next(el for el in serp_doc.by_id("paa").iter("span"))
        assert find_module_root(span, serp_doc.by_id("search"), FirewallConfig()) is serp_doc.by_id("paa")

    def test_stops_under_zone_root(self):
        doc = Document.from_html('<div id="z"><div id="m"><div><span>People also ask</span></div></div></div>')
        span = doc.by_tag("span")
        assert find_module_root(span, doc.by_id("z"), FirewallConfig()) is doc.by_id("m")

    def test_not_found_without_boundary(self):
        doc = Document.from_html('<div id="z"><div><span>People also ask</span></div></div>')
        assert find_module_root(doc.by_tag("span"), None, FirewallConfig()) is None

    def test_depth_limit_from_config(self):
        doc = Document.from_html('<div jscontroller="c"><div><div><span>x</span></div></div></div>')
        span = doc.by_tag("span")
        assert find_module_root(span, None, FirewallConfig(max_climb_depth=3)) is None
        assert find_module_root(span, None, FirewallConfig(max_climb_depth=4)).get("jscontroller") == "c"
