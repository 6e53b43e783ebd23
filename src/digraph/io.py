"""Reading and writing graphs as edge lists

The format is plain text with whitespace separated integers. The first two
are the number of vertices and the number of edges. They are informational
only and not checked against the rest of the file. Then follows one pair of
vertices per edge::

    3
    2
    1 2
    2 3
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from digraph import conf
from digraph.errors import GraphFormatError
from digraph.graph import DirectedGraph

logger = logging.getLogger(__name__)


def _int_tokens(text: str):
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise GraphFormatError(f'expected an integer but got {token!r}') from None


def parse_directed_graph(text: str) -> DirectedGraph[int]:
    """Create a graph from edge list text

    All edges get the weight ``conf.default_weight``.
    """
    tokens = list(_int_tokens(text))
    if len(tokens) < 2:
        raise GraphFormatError('edge list must start with the number of vertices and edges')
    n_vertices, n_edges = tokens[0], tokens[1]
    pairs = tokens[2:]
    if len(pairs) % 2 != 0:
        raise GraphFormatError(f'vertex {pairs[-1]} at end of edge list has no partner')

    g: DirectedGraph[int] = DirectedGraph()
    weight = conf.default_weight
    for v, w in zip(pairs[::2], pairs[1::2]):
        g.add_edge(v, w, weight)

    if g.get_number_of_vertexes() != n_vertices or len(pairs) // 2 != n_edges:
        logger.debug(
            'Header announces %d vertices and %d edges but %d vertices and %d edges were read',
            n_vertices,
            n_edges,
            g.get_number_of_vertexes(),
            len(pairs) // 2,
        )
    return g


def read_directed_graph(path: Union[str, Path]) -> DirectedGraph[int]:
    """Read a graph from an edge list file

    Parameters
    ----------
    path : str or Path
        Path to the edge list file

    Returns
    -------
    DirectedGraph
        Graph with integer vertices

    Raises
    ------
    GraphFormatError
        If the file is not a well formed edge list
    """
    path = Path(path)
    logger.debug('Reading edge list %s', path)
    return parse_directed_graph(path.read_text())


def format_directed_graph(graph: DirectedGraph) -> str:
    lines = [str(graph.get_number_of_vertexes()), str(graph.get_number_of_edges())]
    lines.extend(f'{v} {w}' for v, w, _ in graph.edges())
    return '\n'.join(lines) + '\n'


def write_directed_graph(graph: DirectedGraph, path: Union[str, Path]) -> None:
    """Write a graph as an edge list file

    Weights are not part of the format and are dropped. Isolated vertices
    only show up in the vertex count.
    """
    Path(path).write_text(format_directed_graph(graph))
