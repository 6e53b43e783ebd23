from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Generic, Hashable, Iterator, Tuple, TypeVar

from digraph import conf
from digraph.errors import InvalidEdgeError, UnknownVertexError
from digraph.internals.ds.ordered_set import FrozenOrderedSet
from digraph.internals.graph.directed.connected_components import strongly_connected_component_of
from digraph.internals.graph.directed.inverse import inverse
from digraph.internals.graph.directed.reachability import reachable_from

if TYPE_CHECKING:
    import networkx as nx

V = TypeVar('V', bound=Hashable)


class DirectedGraph(Generic[V]):
    """Weighted directed graph stored as adjacency lists

    Each vertex maps to its successors and, mirrored, to its predecessors,
    both with the edge weight. Vertices must be hashable and mutually
    comparable; the ordering is only used to make iteration and rendering
    deterministic.

    Vertex sets are returned as read-only snapshots and do not follow later
    changes to the graph.

    Examples
    --------
    >>> from digraph import DirectedGraph
    >>> g = DirectedGraph()
    >>> g.add_edge(1, 2)
    False
    >>> g.add_edge(2, 3, 2.5)
    False
    >>> print(g, end='')
    1 --> 2 weight = 1.0
    2 --> 3 weight = 2.5
    >>> g.get_successor_vertex_set(2)
    FrozenOrderedSet([3])
    """

    def __init__(self):
        self._succ: Dict[V, Dict[V, float]] = {}
        self._pred: Dict[V, Dict[V, float]] = {}
        self._number_of_edges = 0

    def add_vertex(self, v: V) -> bool:
        """Add a vertex without edges

        Returns False if the vertex was already in the graph.
        """
        if v in self._succ:
            return False
        self._succ[v] = {}
        self._pred[v] = {}
        return True

    def add_edge(self, v: V, w: V, weight: float = 1.0) -> bool:
        """Add the edge v -> w, adding missing vertices

        Adding an edge that is already in the graph replaces its weight.

        Returns
        -------
        bool
            True if the edge was already in the graph

        Raises
        ------
        ValueError
            If weight is negative or NaN. The graph is left unchanged.
        """
        if not weight >= 0:
            raise ValueError(f'Edge weight must be a non-negative number: {weight!r}')
        self.add_vertex(v)
        self.add_vertex(w)
        was_present = w in self._succ[v]
        self._succ[v][w] = weight
        self._pred[w][v] = weight
        if not was_present:
            self._number_of_edges += 1
        return was_present

    def contains_vertex(self, v: V) -> bool:
        return v in self._succ

    def contains_edge(self, v: V, w: V) -> bool:
        arcs = self._succ.get(v)
        return arcs is not None and w in arcs

    def get_weight(self, v: V, w: V) -> float:
        try:
            return self._succ[v][w]
        except KeyError:
            raise InvalidEdgeError(v, w) from None

    def get_in_degree(self, v: V) -> int:
        return len(self._predecessors(v))

    def get_out_degree(self, v: V) -> int:
        return len(self._successors(v))

    def get_vertex_set(self) -> FrozenOrderedSet[V]:
        return FrozenOrderedSet.sorted(self._succ)

    def get_predecessor_vertex_set(self, v: V) -> FrozenOrderedSet[V]:
        return FrozenOrderedSet.sorted(self._predecessors(v))

    def get_successor_vertex_set(self, v: V) -> FrozenOrderedSet[V]:
        return FrozenOrderedSet.sorted(self._successors(v))

    def get_number_of_vertexes(self) -> int:
        return len(self._succ)

    def get_number_of_edges(self) -> int:
        return self._number_of_edges

    def invert(self) -> DirectedGraph[V]:
        """New graph with the direction of every edge reversed

        Weights and isolated vertices are kept. The returned graph shares no
        state with this one.
        """
        g: DirectedGraph[V] = DirectedGraph()
        g._succ = inverse(self._succ)
        g._pred = inverse(g._succ)
        g._number_of_edges = self._number_of_edges
        return g

    def edges(self) -> Iterator[Tuple[V, V, float]]:
        """Iterate over all edges as (source, target, weight) in canonical order"""
        for v in sorted(self._succ):
            arcs = self._succ[v]
            for w in sorted(arcs):
                yield v, w, arcs[w]

    def reachable_from(self, v: V) -> FrozenOrderedSet[V]:
        """All vertices that can be reached from v, including v itself"""
        self._successors(v)
        return FrozenOrderedSet.sorted(reachable_from({v}, self._succ.__getitem__))

    def strong_component_of(self, v: V) -> FrozenOrderedSet[V]:
        """Vertices that v can reach and that can reach v, including v itself

        Searches only around v. Use StrongComponents to partition the whole graph.
        """
        self._successors(v)
        return FrozenOrderedSet.sorted(
            strongly_connected_component_of(v, self._succ.__getitem__, self._pred.__getitem__)
        )

    def to_networkx(self) -> nx.DiGraph:
        """Convert to a networkx DiGraph with edge weights in the ``weight`` attribute"""
        from digraph.deps import networkx as nx

        g = nx.DiGraph()
        g.add_nodes_from(sorted(self._succ))
        g.add_weighted_edges_from(self.edges())
        return g

    @classmethod
    def from_networkx(cls, nx_graph: nx.DiGraph) -> DirectedGraph:
        """Build a graph from a networkx DiGraph

        Edges without a ``weight`` attribute get weight 1.0.
        """
        g = cls()
        for v in nx_graph.nodes:
            g.add_vertex(v)
        for v, w, weight in nx_graph.edges(data='weight', default=1.0):
            g.add_edge(v, w, float(weight))
        return g

    def _successors(self, v: V) -> Dict[V, float]:
        try:
            return self._succ[v]
        except KeyError:
            raise UnknownVertexError(v) from None

    def _predecessors(self, v: V) -> Dict[V, float]:
        try:
            return self._pred[v]
        except KeyError:
            raise UnknownVertexError(v) from None

    def __contains__(self, v) -> bool:
        return v in self._succ

    def __iter__(self) -> Iterator[V]:
        return iter(sorted(self._succ))

    def __len__(self) -> int:
        return len(self._succ)

    def __repr__(self):
        return (
            f'<{self.__class__.__name__} vertices={len(self._succ)} '
            f'edges={self._number_of_edges}>'
        )

    def __str__(self):
        decimals = conf.weight_decimals
        return ''.join(
            f'{v} --> {w} weight = {weight:.{decimals}f}\n' for v, w, weight in self.edges()
        )
