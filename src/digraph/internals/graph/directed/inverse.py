from typing import Dict, Mapping, TypeVar

T = TypeVar('T')
W = TypeVar('W')


def inverse(g: Mapping[T, Mapping[T, W]]) -> Dict[T, Dict[T, W]]:
    """Reverse every arc of a weighted adjacency mapping

    Every key of g is kept, also those without arcs in either direction.
    """
    h: Dict[T, Dict[T, W]] = {left: {} for left in g}

    for left, arcs in g.items():
        for right, weight in arcs.items():
            if right in h:
                h[right][left] = weight
            else:
                h[right] = {left: weight}

    return h
