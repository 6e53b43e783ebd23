from typing import Callable, Iterable, TypeVar

T = TypeVar('T')


def reachable_from(start_nodes: Iterable[T], neighbors: Callable[[T], Iterable[T]]) -> set[T]:
    """All vertices reachable from start_nodes, start_nodes included"""
    closure = set(start_nodes)
    stack = list(closure)
    while stack:
        u = stack.pop()
        for v in neighbors(u):
            if v not in closure:
                closure.add(v)
                stack.append(v)

    return closure
