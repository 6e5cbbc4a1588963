import random

import pytest

from algokit.graph import UndirectedGraph
from algokit.maxflow import EdmondsKarp, RelabelToFront

NETWORK = {
    "s": {"v1": 16, "v2": 13},
    "v1": {"v3": 12},
    "v2": {"v1": 4, "v4": 14},
    "v3": {"v2": 9, "t": 20},
    "v4": {"v3": 7, "t": 4},
    "t": {},
}
NETWORK_MAX_FLOW = 23


def _cap(u, v):
    return NETWORK.get(u, {}).get(v, 0)


def _check_conservation(solver, flow):
    vertices = list(NETWORK)
    for u in vertices:
        net = sum(_cap(u, v) - solver.residual(u, v) for v in vertices)
        if u == "s":
            assert net == flow
        elif u == "t":
            assert net == -flow
        else:
            assert net == 0
        for v in vertices:
            assert solver.residual(u, v) >= 0


def test_edmonds_karp_on_directed_network():
    ek = EdmondsKarp(NETWORK)
    flow = ek.run("s", "t")
    assert flow == NETWORK_MAX_FLOW
    _check_conservation(ek, flow)


def test_relabel_to_front_on_directed_network():
    rtf = RelabelToFront(NETWORK)
    flow = rtf.run("s", "t")
    assert flow == NETWORK_MAX_FLOW
    _check_conservation(rtf, flow)


def test_push_relabel_on_directed_network():
    rtf = RelabelToFront(NETWORK)
    flow = rtf.run_push_relabel("s", "t")
    assert flow == EdmondsKarp(NETWORK).run("s", "t")
    _check_conservation(rtf, flow)


def test_repeated_runs_give_same_result():
    ek = EdmondsKarp(NETWORK)
    first = ek.run("s", "t")
    second = ek.run("s", "t")
    assert first == NETWORK_MAX_FLOW
    assert second == NETWORK_MAX_FLOW


@pytest.mark.parametrize("seed", range(6))
def test_algorithms_agree_on_random_graphs(seed):
    g = UndirectedGraph.random_graph(9, random.Random(seed))
    expected = EdmondsKarp(g).run(1, 8)
    assert RelabelToFront(g).run(1, 8) == expected
    assert RelabelToFront(g).run_push_relabel(1, 8) == expected
    assert expected <= sum(g.weight(1, v) for v in g.neighbors(1))


@pytest.mark.parametrize("seed", range(4))
def test_flow_equals_minimum_cut(seed):
    g = UndirectedGraph.random_graph(10, random.Random(100 + seed))
    ek = EdmondsKarp(g)
    flow = ek.run(1, 9)
    reachable = {1}
    frontier = [1]
    while frontier:
        u = frontier.pop()
        for v in g.vertices():
            if v not in reachable and ek.residual(u, v) > 0:
                reachable.add(v)
                frontier.append(v)
    assert 9 not in reachable
    cut = sum(
        g.weight(u, v)
        for u in reachable
        for v in g.neighbors(u)
        if v not in reachable
    )
    assert cut == flow


def test_disconnected_sink_has_no_flow():
    g = UndirectedGraph()
    for v in (1, 2, 3):
        g.add_vertex(v)
    g.add_edge(1, 2, 5)
    assert EdmondsKarp(g).run(1, 3) == 0
    assert RelabelToFront(g).run(1, 3) == 0
    assert RelabelToFront(g).run_push_relabel(1, 3) == 0


def test_single_edge_flow_is_its_weight():
    g = UndirectedGraph()
    g.add_vertex("a")
    g.add_vertex("b")
    g.add_edge("a", "b", 17)
    assert EdmondsKarp(g).run("a", "b") == g.weight("a", "b")
    assert RelabelToFront(g).run("a", "b") == g.weight("a", "b")


def test_same_source_and_sink_is_rejected():
    with pytest.raises(ValueError):
        EdmondsKarp(NETWORK).run("s", "s")
    with pytest.raises(ValueError):
        RelabelToFront(NETWORK).run("t", "t")


def test_unknown_vertex_is_rejected():
    with pytest.raises(KeyError):
        EdmondsKarp(NETWORK).run("s", "nowhere")
    with pytest.raises(KeyError):
        RelabelToFront(NETWORK).residual("s", "nowhere")


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        EdmondsKarp({"a": {"b": -1}})