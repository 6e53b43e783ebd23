import pytest

from digraph.internals.ds.ordered_set import FrozenOrderedSet


def test_order():
    s = FrozenOrderedSet([3, 1, 2, 1])
    assert list(s) == [3, 1, 2]
    assert list(reversed(s)) == [2, 1, 3]
    assert s[0] == 3
    assert s[-1] == 2
    assert len(s) == 3


def test_sorted():
    assert list(FrozenOrderedSet.sorted(['b', 'c', 'a'])) == ['a', 'b', 'c']


def test_set_operations():
    s = FrozenOrderedSet([1, 2, 3])
    assert s == {1, 2, 3}
    assert s <= {1, 2, 3, 4}
    assert 2 in s
    assert 5 not in s
    intersection = s & {2, 3, 4}
    assert isinstance(intersection, FrozenOrderedSet)
    assert list(intersection) == [2, 3]
    assert list(s | {4}) == [1, 2, 3, 4]
    assert list(s - {1}) == [2, 3]


def test_immutable():
    s = FrozenOrderedSet([1, 2])
    for name in ('add', 'discard', 'remove', 'pop', 'clear', 'update'):
        assert not hasattr(s, name)
    with pytest.raises(AttributeError):
        s.extra = 1


def test_hash():
    assert hash(FrozenOrderedSet([1, 2])) == hash(FrozenOrderedSet([2, 1]))
    assert {FrozenOrderedSet([1, 2]): 'x'}[FrozenOrderedSet([2, 1])] == 'x'


def test_repr():
    assert repr(FrozenOrderedSet()) == 'FrozenOrderedSet()'
    assert repr(FrozenOrderedSet(['a'])) == "FrozenOrderedSet(['a'])"


def test_hash_ignores_order():
    s = FrozenOrderedSet(['b', 'a'])
    assert hash(s) == hash(s)
    assert s == frozenset({'a', 'b'})
    assert len({s, FrozenOrderedSet(['a', 'b'])}) == 1
