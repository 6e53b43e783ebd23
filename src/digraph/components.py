from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Generic, Hashable, Iterator, List, Mapping, TypeVar

from digraph.errors import UnknownVertexError
from digraph.graph import DirectedGraph
from digraph.internals.ds.ordered_set import FrozenOrderedSet
from digraph.order import DepthFirstOrder, depth_first_visit

if TYPE_CHECKING:
    from digraph.deps.rich import console as rich_console

V = TypeVar('V', bound=Hashable)

logger = logging.getLogger(__name__)


class StrongComponents(Generic[V]):
    """Strongly connected components of a directed graph

    The components are computed once, at construction, with the
    Kosaraju-Sharir algorithm:

    1. Depth-first post order of the graph
    2. Depth-first sweep over the inverted graph, taking roots in reverse post
       order. Every tree of this sweep is one component.

    Components are numbered 0, 1, 2, ... in the order the second sweep
    discovers them. Two vertices get the same number if and only if each can
    be reached from the other.

    Parameters
    ----------
    graph : DirectedGraph
        Graph to partition. Later changes to it are not reflected.

    Examples
    --------
    >>> from digraph import DirectedGraph, StrongComponents
    >>> g = DirectedGraph()
    >>> for v, w in [(1, 2), (2, 1), (2, 3)]:
    ...     _ = g.add_edge(v, w)
    >>> sc = StrongComponents(g)
    >>> sc.number_of_components()
    2
    >>> print(sc, end='')
    Component 0: 1, 2
    Component 1: 3
    """

    def __init__(self, graph: DirectedGraph[V]):
        sequence = DepthFirstOrder(graph).reverse_post_order()
        inverted = graph.invert()

        self._components: Dict[int, FrozenOrderedSet[V]] = {}
        self._component_of: Dict[V, int] = {}
        visited = set()
        for vertex in sequence:
            if vertex in visited:
                continue
            members: List[V] = []
            depth_first_visit(vertex, inverted.get_successor_vertex_set, visited, members.append)
            comp = len(self._components)
            self._components[comp] = FrozenOrderedSet.sorted(members)
            for member in members:
                self._component_of[member] = comp

        self._links = Counter(
            (self._component_of[v], self._component_of[w])
            for v, w, _ in graph.edges()
            if self._component_of[v] != self._component_of[w]
        )
        logger.debug(
            'Found %d strongly connected components in graph with %d vertices',
            len(self._components),
            len(self._component_of),
        )

    def number_of_components(self) -> int:
        return len(self._components)

    def component_of(self, v: V) -> int:
        """Number of the component that v belongs to"""
        try:
            return self._component_of[v]
        except KeyError:
            raise UnknownVertexError(v) from None

    def component(self, comp: int) -> FrozenOrderedSet[V]:
        """Vertices of component number comp"""
        return self._components[comp]

    def components(self) -> Mapping[int, FrozenOrderedSet[V]]:
        """Read-only mapping from component number to its vertices"""
        return MappingProxyType(self._components)

    def same_component(self, v: V, w: V) -> bool:
        return self.component_of(v) == self.component_of(w)

    def condensation(self) -> DirectedGraph[int]:
        """Graph of components

        Each component becomes a vertex. The weight of an edge between two
        components is the number of edges of the partitioned graph going between
        them. The result is acyclic.
        """
        g: DirectedGraph[int] = DirectedGraph()
        for comp in self._components:
            g.add_vertex(comp)
        for (v, w), count in self._links.items():
            g.add_edge(v, w, float(count))
        return g

    def print_table(self, console: rich_console.Console | None = None) -> None:
        """Print the components as a table to the terminal"""
        from digraph.deps.rich import box as rich_box
        from digraph.deps.rich import console as rich_console
        from digraph.deps.rich import table as rich_table

        table = rich_table.Table(title="Strongly connected components", box=rich_box.SQUARE)
        table.add_column("Component", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("Vertices")
        for comp, members in self._components.items():
            table.add_row(str(comp), str(len(members)), ', '.join(map(str, members)))

        if console is None:
            console = rich_console.Console()
        console.print(table)

    def __iter__(self) -> Iterator[FrozenOrderedSet[V]]:
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self):
        return f'<{self.__class__.__name__} components={len(self._components)}>'

    def __str__(self):
        return ''.join(
            f'Component {comp}: {", ".join(map(str, members))}\n'
            for comp, members in self._components.items()
        )


def strong_components(graph: DirectedGraph[V]) -> List[FrozenOrderedSet[V]]:
    """Strongly connected components of graph in discovery order"""
    return list(StrongComponents(graph))
