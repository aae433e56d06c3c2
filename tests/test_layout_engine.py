"""
Layout engine tests: anchoring, left/right split, centring, non-overlap,
collapse handling and the two measurement policies.
"""

import pytest

from helpers import PLAIN_CONFIG, FailingMeasurer, StubMeasurer, record
from layout import LayoutEngine, MeasurementPolicy
from layout.extent import SubtreeExtent, is_visible, visible_children
from mindmap import MindMapNode


def build(data):
    return MindMapNode.from_data(data)


def three_level_tree():
    return build(record(
        "root",
        record("a", record("a1"), record("a2"), record("a3")),
        record("b", record("b1", record("b1x"), record("b1y"))),
        record("c"),
        record("d", record("d1"), record("d2")),
        record("e"),
    ))


def band(engine, node):
    """[top, bottom) of the band the node's subtree occupies."""
    extent = engine.get_subtree_height(node)
    top = node.y - (extent - node.height) / 2
    return top, top + extent


class TestScenarios:
    def test_single_root_is_centred_on_anchor(self):
        engine = LayoutEngine(StubMeasurer({"root": (80, 40)}), PLAIN_CONFIG)
        root = build(record("root"))
        engine.layout(root, 100, 100)
        assert (root.x, root.y) == (60, 80)
        assert (root.width, root.height) == (80, 40)

    def test_two_children_split_right_and_left(self):
        engine = LayoutEngine(StubMeasurer({"root": (80, 40), "a": (60, 40), "b": (60, 40)}), PLAIN_CONFIG)
        root = build(record("root", record("a"), record("b")))
        engine.layout(root, 0, 0)
        a, b = root.children

        assert a.x == root.x + root.width + 100
        assert b.x == root.x - b.width - 100
        assert a.center_y == pytest.approx(root.center_y)
        assert b.center_y == pytest.approx(root.center_y)

    def test_three_children_extent_and_centring(self):
        sizes = {"root": (80, 40), "p": (100, 40), "c1": (100, 40), "c2": (100, 60), "c3": (100, 40)}
        engine = LayoutEngine(StubMeasurer(sizes), PLAIN_CONFIG)
        root = build(record("root", record("p", record("c1"), record("c2"), record("c3"))))
        engine.layout(root, 0, 0)
        p = root.children[0]
        c1, c2, c3 = p.children

        assert engine.get_subtree_height(p) == 200
        assert [c1.y, c2.y, c3.y] == [-100, -30, 60]
        assert p.center_y == pytest.approx((c1.y + c3.y + c3.height) / 2)

    def test_collapse_drops_children_extent(self):
        sizes = {"p": (100, 40), "c2": (100, 60)}
        engine = LayoutEngine(StubMeasurer(sizes), PLAIN_CONFIG)
        root = build(record("root", record("p", record("c1"), record("c2"), record("c3"))))
        engine.layout(root, 0, 0)
        p = root.children[0]
        assert engine.get_subtree_height(p) == 200

        p.expanded = False
        assert engine.get_subtree_height(p) == 40


class TestInvariants:
    def test_anchor_invariant(self, engine):
        root = three_level_tree()
        engine.layout(root, 321.5, -48.25)
        assert root.x + root.width / 2 == pytest.approx(321.5)
        assert root.y + root.height / 2 == pytest.approx(-48.25)

    def test_idempotent(self, engine):
        root = three_level_tree()
        engine.layout(root, 10, 20)
        first = [(n.id, n.x, n.y, n.width, n.height) for n in root.iter_nodes()]
        engine.layout(root, 10, 20)
        second = [(n.id, n.x, n.y, n.width, n.height) for n in root.iter_nodes()]
        assert first == second

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 8])
    @pytest.mark.parametrize("anchor", [(0, 0), (500, -200)])
    def test_root_split_by_index(self, engine, count, anchor):
        root = build(record("root", *[record(f"n{i}") for i in range(count)]))
        engine.layout(root, *anchor)
        mid = (count + 1) // 2
        assert all(c.x > root.x for c in root.children[:mid])
        assert all(c.x < root.x for c in root.children[mid:])

    def test_sibling_bands_do_not_overlap(self):
        sizes = {"a1": (100, 120), "b1x": (100, 90), "d": (100, 75), "c": (300, 20)}
        engine = LayoutEngine(StubMeasurer(sizes), PLAIN_CONFIG)
        root = three_level_tree()
        engine.layout(root, 0, 0)

        right, left = root.children[:3], root.children[3:]
        groups = [right, left] + [visible_children(n) for n in root.iter_nodes() if not n.is_root]
        for group in groups:
            bands = [band(engine, n) for n in group]
            for (_, bottom), (next_top, _) in zip(bands, bands[1:]):
                assert bottom + PLAIN_CONFIG.node_spacing == pytest.approx(next_top)

    def test_parent_centred_on_children_span(self, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        for node in root.iter_nodes():
            children = visible_children(node)
            if node.is_root or not children:
                continue
            top, _ = band(engine, children[0])
            _, bottom = band(engine, children[-1])
            assert node.center_y == pytest.approx((top + bottom) / 2)

    def test_growth_direction_is_inherited(self, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        a, d = root.children[0], root.children[3]
        for child in a.children:
            assert child.x == a.x + a.width + 100
        for child in d.children:
            assert child.x + child.width + 100 == d.x
        assert d.children_direction() == "left"
        assert a.children_direction() == "right"


class TestCollapse:
    def test_collapsed_children_keep_stale_coordinates(self, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        a = root.children[0]
        before = [(c.x, c.y) for c in a.children]

        a.expanded = False
        engine.layout(root, 400, 300)
        assert [(c.x, c.y) for c in a.children] == before
        assert a.x != 0 or a.y != 0
        assert not is_visible(a.children[0])

    def test_collapse_never_grows_extent(self, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        for node in list(root.iter_nodes())[1:]:
            expanded_extent = engine.get_subtree_height(node)
            node.expanded = False
            assert engine.get_subtree_height(node) <= expanded_extent
            assert engine.get_subtree_height(node) == node.height
            node.expanded = True

    def test_root_sides_are_independent(self, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        left_before = [(c.x, c.y) for c in root.children[3:]]

        root.expanded_left = False
        engine.layout(root, 50, 50)
        assert [(c.x, c.y) for c in root.children[3:]] == left_before
        assert all(c.x > root.x for c in root.children[:3])
        assert engine.get_subtree_height(root) == SubtreeExtent(30).of_group(root.children[:3])

    def test_both_sides_collapsed_leaves_root_alone(self, engine):
        root = three_level_tree()
        root.expanded_left = root.expanded_right = False
        engine.layout(root, 0, 0)
        assert engine.get_subtree_height(root) == root.height
        assert all((c.x, c.y) == (0, 0) for c in root.children)

    def test_empty_side_contributes_nothing(self, engine):
        root = build(record("root", record("only")))
        engine.layout(root, 0, 0)
        only = root.children[0]
        assert only.x > root.x
        assert engine.get_subtree_height(root) == max(root.height, only.height)

    def test_root_extent_stacks_both_sides(self, engine):
        root = build(record("root", record("a"), record("b")))
        engine.layout(root, 0, 0)
        assert engine.get_subtree_height(root) == 40 + 30 + 40


class TestMeasurementPolicy:
    def test_each_node_measured_once_per_layout(self, measurer, engine):
        root = three_level_tree()
        engine.layout(root, 0, 0)
        assert measurer.calls == len(list(root.iter_nodes()))

    def test_positions_only_never_measures(self):
        root = three_level_tree()
        LayoutEngine(StubMeasurer(), PLAIN_CONFIG).layout(root, 0, 0)
        expected = [(n.x, n.y) for n in root.iter_nodes()]

        engine = LayoutEngine(FailingMeasurer(), PLAIN_CONFIG)
        for node in root.iter_nodes():
            node.x = node.y = 0
        engine.layout_positions_only(root, 0, 0)
        assert [(n.x, n.y) for n in root.iter_nodes()] == expected

    def test_positions_only_uses_externally_set_sizes(self):
        root = build(record("root", record("a"), width=80, height=40))
        root.children[0].width, root.children[0].height = 150, 90
        engine = LayoutEngine(FailingMeasurer(), PLAIN_CONFIG)
        engine.layout(root, 0, 0, MeasurementPolicy.REUSE_EXISTING)
        a = root.children[0]
        assert a.x == 40 + 100
        assert a.y == -45

    def test_recalculate_sizes_keeps_positions(self):
        measurer = StubMeasurer({"a": (200, 70)})
        engine = LayoutEngine(measurer, PLAIN_CONFIG)
        root = build(record("root", record("a", x=5, y=6), x=1, y=2))
        engine.recalculate_sizes(root)
        a = root.children[0]
        assert (root.x, root.y, a.x, a.y) == (1, 2, 5, 6)
        assert (a.width, a.height) == (200, 70)

    def test_relayout_keeps_root_centre(self):
        measurer = StubMeasurer({"root": (80, 40)})
        engine = LayoutEngine(measurer, PLAIN_CONFIG)
        root = build(record("root", record("a")))
        engine.layout(root, 300, 200)

        measurer.sizes["root"] = (160, 80)
        engine.relayout(root)
        assert root.center_x == pytest.approx(300)
        assert root.center_y == pytest.approx(200)
        assert (root.width, root.height) == (160, 80)

    def test_floors_apply_to_empty_measurements(self):
        engine = LayoutEngine(StubMeasurer(default=(0, 0)))
        root = build(record("root"))
        engine.layout(root, 0, 0)
        assert root.width == engine.config.min_width
        assert root.height == engine.config.min_height


class TestSummary:
    def test_summary_lists_visible_nodes_and_edges(self, engine):
        from layout import summarize_layout

        root = build(record("root", record("a", record("a1")), record("b", record("b1"), expanded=False)))
        engine.layout(root, 0, 0)
        summary = summarize_layout(root)

        assert set(summary["nodes"]) == {"root", "a", "a1", "b"}
        assert {(e["from"], e["to"]) for e in summary["edges"]} == {("root", "a"), ("a", "a1"), ("root", "b")}

        a, b = root.children
        to_b = next(e for e in summary["edges"] if e["to"] == "b")
        assert to_b["points"] == [[root.x, root.center_y], [b.x + b.width, b.center_y]]
        to_a = next(e for e in summary["edges"] if e["to"] == "a")
        assert to_a["points"] == [[root.x + root.width, root.center_y], [a.x, a.center_y]]

        bounds = summary["bounds"]
        assert bounds["left"] == b.x
        assert bounds["right"] == a.children[0].x + a.children[0].width
        assert summary["width"] == bounds["right"] - bounds["left"]


def chain(depth):
    """Root plus a single line of `depth` descendants; returns (root, deepest)."""
    root = MindMapNode("root", "root")
    node = root
    for i in range(depth):
        child = MindMapNode(f"n{i}", f"n{i}", parent=node)
        node.children.append(child)
        node = child
    return root, node


class TestDeepTrees:
    DEPTH = 3000

    def test_layout_deep_chain(self, engine):
        root, deepest = chain(self.DEPTH)
        engine.layout(root, 0, 0)
        assert deepest.x == pytest.approx(root.x + self.DEPTH * (100 + 100))
        assert deepest.center_y == pytest.approx(root.center_y)
        assert engine.get_subtree_height(root) == 40

    def test_measures_every_node_of_deep_chain(self, measurer, engine):
        root, _ = chain(self.DEPTH)
        engine.recalculate_sizes(root)
        assert measurer.calls == self.DEPTH + 1

    def test_collapsed_deep_chain(self, engine):
        root, deepest = chain(self.DEPTH)
        root.children[0].expanded = False
        engine.layout(root, 0, 0)
        assert (deepest.x, deepest.y) == (0, 0)
        assert engine.get_subtree_height(root.children[0]) == 40
