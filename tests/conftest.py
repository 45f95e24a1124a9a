from __future__ import annotations

import random
from typing import Callable, Iterable, Optional, Tuple

import pytest

from domfront import AdjacencyGraph
from domfront.util.graphalgorithim.dominator import ALGORITHMS


EdgeList = Iterable[Tuple[object, object]]


def make_graph(edges: EdgeList, entry, exit=None, vertices=()) -> AdjacencyGraph:
    return AdjacencyGraph.from_edges(edges, entry=entry, exit=exit, vertices=vertices)


def random_edges(rng: random.Random, count: int, density: float):
    """
    Random directed multigraph on vertices 0..count-1.

    A spine 0 -> 1 -> ... is not guaranteed, so some vertices may be
    unreachable from 0. Self-loops and parallel edges may occur.
    """
    edges = []
    for _ in range(int(count * density)):
        edges.append((rng.randrange(count), rng.randrange(count)))
    # Keep most of the graph reachable
    for v in range(1, count):
        if rng.random() < 0.7:
            edges.append((rng.randrange(v), v))
    return edges


@pytest.fixture()
def graph_factory() -> Callable[..., AdjacencyGraph]:
    return make_graph


@pytest.fixture(params=ALGORITHMS)
def algorithm(request) -> str:
    return request.param


@pytest.fixture()
def random_graphs() -> Callable[[int, Optional[int]], list]:
    """
    Deterministic batch of random graphs as (edges, vertex count) pairs.
    """

    def _graphs(n: int, seed: Optional[int] = 1234):
        rng = random.Random(seed)
        graphs = []
        for _ in range(n):
            count = rng.randrange(1, 30)
            density = rng.choice((0.5, 1.0, 2.0, 3.0))
            graphs.append((random_edges(rng, count, density), count))
        return graphs

    return _graphs
