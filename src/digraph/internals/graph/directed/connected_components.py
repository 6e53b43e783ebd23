from typing import Callable, Iterable, TypeVar

from .reachability import reachable_from

T = TypeVar('T')


def strongly_connected_component_of(
    vertex: T, successors: Callable[[T], Iterable[T]], predecessors: Callable[[T], Iterable[T]]
) -> set[T]:
    """Vertices that can both reach and be reached from vertex

    Works one component at a time, so it is meant for spot checks. Use
    digraph.components.StrongComponents to partition a whole graph.
    """
    forward_reachable = reachable_from({vertex}, successors)

    # NOTE Backward search restricted to the forward reachable vertices gives
    # the intersection of both closures without computing the full backward
    # closure on the whole graph.
    return reachable_from(
        {vertex},
        lambda u: filter(forward_reachable.__contains__, predecessors(u)),
    )
