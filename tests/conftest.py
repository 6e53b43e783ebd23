from pathlib import Path

import pytest


@pytest.fixture(scope='session')
def testdata():
    """Test data (root) folder."""
    return Path(__file__).resolve().parent / 'testdata'


@pytest.fixture(scope='session')
def tiny_path(testdata):
    return testdata / 'tinyDG.txt'


@pytest.fixture(scope='session')
def example_path(testdata):
    return testdata / 'exampleDG.txt'


@pytest.fixture
def create_graph():
    from digraph import DirectedGraph

    def _create(edges, vertices=()):
        g = DirectedGraph()
        for v in vertices:
            g.add_vertex(v)
        for edge in edges:
            g.add_edge(*edge)
        return g

    return _create


@pytest.fixture
def example_graph(create_graph):
    return create_graph(
        [
            (1, 2),
            (1, 3),
            (2, 1),
            (2, 3),
            (3, 1),
            (1, 4),
            (5, 4),
            (5, 7),
            (6, 5),
            (7, 6),
            (7, 8),
            (8, 2),
        ]
    )


@pytest.fixture
def small_graph(create_graph):
    return create_graph([(1, 2), (2, 5), (5, 1), (2, 6), (3, 7), (4, 3), (4, 6), (7, 4)])
