from digraph.internals.module.lazy import LazyImport


def test_dir():
    import digraph.internals.module.lazy

    module = LazyImport('x', {}, 'digraph.internals.module.lazy')
    assert dir(digraph.internals.module.lazy) == dir(module)


def test_getattr():
    module = LazyImport('x', {}, 'digraph.internals.module.lazy')
    assert getattr(module, 'LazyImport') is LazyImport


def test_submodule():
    import os

    module = LazyImport('x', {}, 'os', attr='path')
    assert dir(module) == dir(os.path)


def test_replaces_itself_in_parent():
    import json

    parent = {}
    parent['json'] = LazyImport('json', parent, 'json')
    assert parent['json'].dumps([]) == '[]'
    assert parent['json'] is json


def test_deps_networkx():
    from digraph.deps import networkx as nx

    assert nx.DiGraph().number_of_nodes() == 0
