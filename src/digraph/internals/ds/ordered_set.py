from typing import AbstractSet, Dict, Iterable, Literal, Optional, Tuple, TypeVar

T = TypeVar('T')

NIL = 0


def _map(iterable: Iterable[T]) -> Iterable[Tuple[T, Literal[0]]]:
    return map(lambda x: (x, NIL), iterable)


class FrozenOrderedSet(AbstractSet[T]):
    """Immutable set that remembers the order its elements were given in

    Used for every vertex set handed out by a graph. There are no mutating
    methods, so callers holding one cannot reach into the graph's adjacency
    maps.
    """

    __slots__ = ('_dict', '_hashcache')

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        # NOTE A dictionary guarantees iteration order to be insertion order
        self._dict: Dict[T, Literal[0]] = {} if iterable is None else dict(_map(iterable))
        self._hashcache: Optional[int] = None

    @classmethod
    def sorted(cls, iterable: Iterable[T]) -> 'FrozenOrderedSet[T]':
        return cls(sorted(iterable))

    # NOTE The following are required by the AbstractSet ABC

    def __contains__(self, key):
        return key in self._dict

    def __iter__(self):
        # NOTE This follows insertion order
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)

    # NOTE The following are required by the ordered nature of FrozenOrderedSet

    def __reversed__(self):
        return reversed(self._dict.keys())

    def __getitem__(self, index: int) -> T:
        return list(self._dict)[index]

    def __hash__(self):
        if self._hashcache is None:
            # NOTE Set._hash is the order independent hash of the Set mixin
            self._hashcache = self._hash()
        return self._hashcache

    def __repr__(self):
        c = self.__class__.__name__
        if self:
            return f'{c}(%r)' % (list(self),)
        return f'{c}()'
