"""
Property tests for dominator trees and frontiers on generated graphs.

The frontier oracle is the definition itself, evaluated on dominator sets
computed by a naive fixed point: n is in the frontier of x when x dominates a
reachable predecessor of n and does not strictly dominate n. A node is never
reported in its own frontier.
"""

from domfront import (
    AdjacencyGraph,
    build_dominator_tree,
    compute_dominance_frontiers,
    compute_post_dominance_frontiers,
)


def reachable(g, start):
    seen = {start}
    pending = [start]
    while pending:
        v = pending.pop()
        for s in g.successors(v):
            if s not in seen:
                seen.add(s)
                pending.append(s)
    return seen


def dominator_sets(g, entry):
    live = reachable(g, entry)
    dom = {v: set(live) for v in live}
    dom[entry] = {entry}
    changed = True
    while changed:
        changed = False
        for v in live:
            if v == entry:
                continue
            preds = [dom[p] for p in g.predecessors(v) if p in live]
            new = set.intersection(*preds) | {v}
            if new != dom[v]:
                dom[v] = new
                changed = True
    return dom


def definition_frontiers(g, entry):
    dom = dominator_sets(g, entry)
    df = {v: set() for v in g.vertices()}
    for n in dom:
        for p in g.predecessors(n):
            if p not in dom:
                continue
            for x in dom[p]:
                strictly = x in dom[n] and x != n
                if not strictly and x != n:
                    df[x].add(n)
    return df


def build(edges, count, exit=None):
    return AdjacencyGraph.from_edges(edges, entry=0, exit=exit, vertices=range(count))


def test_frontiers_match_definition(random_graphs, algorithm):
    for edges, count in random_graphs(80):
        g = build(edges, count)
        result = compute_dominance_frontiers(g, config={"algorithm": algorithm})
        expected = definition_frontiers(g, 0)
        assert {v: set(df) for v, df in result.items()} == expected, edges


def test_idoms_form_tree_rooted_at_entry(random_graphs, algorithm):
    for edges, count in random_graphs(50):
        g = build(edges, count)
        idoms = build_dominator_tree(g, 0, {"algorithm": algorithm})
        live = reachable(g, 0)

        assert idoms[0] is None
        for v in g.vertices():
            if v not in live:
                assert idoms[v] is None
                continue

            # The idom chain reaches the entry without repeating a node
            seen = set()
            runner = v
            while runner != 0:
                assert runner not in seen
                seen.add(runner)
                runner = idoms[runner]
                assert runner is not None


def test_idom_is_closest_strict_dominator(random_graphs):
    for edges, count in random_graphs(40):
        g = build(edges, count)
        idoms = build_dominator_tree(g, 0)
        dom = dominator_sets(g, 0)
        for v, d in idoms.items():
            if d is None:
                continue
            strict = dom[v] - {v}
            assert d in strict
            # Every other strict dominator dominates d
            assert all(x in dom[d] for x in strict)


def test_frontier_lists_have_no_duplicates(random_graphs):
    for edges, count in random_graphs(50):
        g = build(edges, count)
        for df in compute_dominance_frontiers(g).values():
            assert len(df) == len(set(df))


def test_entry_only_in_frontier_with_back_edge(random_graphs):
    for edges, count in random_graphs(50):
        g = build(edges, count)
        live = reachable(g, 0)
        has_back_edge = any(p in live for p in g.predecessors(0))
        in_frontier = any(0 in df for df in compute_dominance_frontiers(g).values())
        if not has_back_edge:
            assert not in_frontier


def test_unreachable_nodes_neither_give_nor_receive(random_graphs):
    for edges, count in random_graphs(50):
        g = build(edges, count)
        live = reachable(g, 0)
        result = compute_dominance_frontiers(g)
        for v, df in result.items():
            if v not in live:
                assert df == []
            assert all(n in live for n in df)


def test_keys_follow_vertex_order(random_graphs):
    for edges, count in random_graphs(20):
        g = build(edges, count)
        assert list(compute_dominance_frontiers(g)) == list(g.vertices())


def test_post_dominance_matches_definition_on_reverse(random_graphs, algorithm):
    for edges, count in random_graphs(40):
        g = build(edges, count, exit=count - 1)
        result = compute_post_dominance_frontiers(g, {"algorithm": algorithm})
        expected = definition_frontiers(g.reverse(), count - 1)
        assert {v: set(df) for v, df in result.items()} == expected, edges
