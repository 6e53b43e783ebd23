from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

if TYPE_CHECKING:
    from digraph.graph import DirectedGraph

V = TypeVar('V', bound=Hashable)


def depth_first_visit(
    root: V,
    successors: Callable[[V], Iterable[V]],
    visited: Set[V],
    on_enter: Callable[[V], None],
    on_finish: Optional[Callable[[V], None]] = None,
) -> None:
    """Depth-first search from root over vertices not yet in visited

    Vertices are added to visited when entered. on_enter is called when a
    vertex is entered and on_finish, if given, when all of its successors are done.
    Runs on an explicit stack, so the depth of the graph is not limited by
    the interpreter's recursion limit.
    """
    visited.add(root)
    on_enter(root)
    stack = [(root, iter(successors(root)))]
    while stack:
        v, remaining = stack[-1]
        for w in remaining:
            if w not in visited:
                visited.add(w)
                on_enter(w)
                stack.append((w, iter(successors(w))))
                break
        else:
            stack.pop()
            if on_finish is not None:
                on_finish(v)


class DepthFirstOrder(Generic[V]):
    """Pre and post order of a depth-first search covering a whole graph

    Roots are taken in canonical vertex order and successors are explored in
    canonical order, so the orders are fully determined by the graph.

    Examples
    --------
    >>> from digraph import DirectedGraph, DepthFirstOrder
    >>> g = DirectedGraph()
    >>> g.add_edge(1, 2)
    False
    >>> g.add_edge(1, 3)
    False
    >>> DepthFirstOrder(g).post_order()
    [2, 3, 1]
    """

    def __init__(self, graph: DirectedGraph[V]):
        self._pre: List[V] = []
        self._post: List[V] = []
        visited: Set[V] = set()
        for root in graph.get_vertex_set():
            if root not in visited:
                depth_first_visit(
                    root,
                    graph.get_successor_vertex_set,
                    visited,
                    self._pre.append,
                    self._post.append,
                )

    def pre_order(self) -> List[V]:
        return list(self._pre)

    def post_order(self) -> List[V]:
        return list(self._post)

    def reverse_post_order(self) -> List[V]:
        return self._post[::-1]


def post_order(graph: DirectedGraph[V]) -> List[V]:
    """Vertices of graph in the order a depth-first search finishes them"""
    return DepthFirstOrder(graph).post_order()
