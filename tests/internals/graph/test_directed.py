from digraph.internals.graph.directed.connected_components import (
    strongly_connected_component_of,
)
from digraph.internals.graph.directed.inverse import inverse
from digraph.internals.graph.directed.reachability import reachable_from


def test_inverse():
    g = {1: {2: 1.0, 3: 2.0}, 2: {3: 0.5}, 4: {}}
    assert inverse(g) == {1: {}, 2: {1: 1.0}, 3: {1: 2.0, 2: 0.5}, 4: {}}


def test_inverse_twice():
    g = {'a': {'b': 1.0}, 'b': {'a': 3.0, 'b': 4.0}, 'c': {}}
    assert inverse(inverse(g)) == g


def test_inverse_empty():
    assert inverse({}) == {}


def test_reachable_from():
    g = {1: [2], 2: [3], 3: [1], 4: [1], 5: []}
    assert reachable_from({1}, g.__getitem__) == {1, 2, 3}
    assert reachable_from([4], g.__getitem__) == {1, 2, 3, 4}
    assert reachable_from({5}, g.__getitem__) == {5}
    assert reachable_from(set(), g.__getitem__) == set()


def test_strongly_connected_component_of():
    succ = {1: [2], 2: [1, 3], 3: [4], 4: [3], 5: [5]}
    pred = inverse({v: dict.fromkeys(ws) for v, ws in succ.items()})
    assert strongly_connected_component_of(1, succ.__getitem__, pred.__getitem__) == {1, 2}
    assert strongly_connected_component_of(4, succ.__getitem__, pred.__getitem__) == {3, 4}
    assert strongly_connected_component_of(5, succ.__getitem__, pred.__getitem__) == {5}
