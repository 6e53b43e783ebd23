from typing import TYPE_CHECKING

from digraph.internals.module.lazy import LazyImport

if TYPE_CHECKING:
    import networkx
else:
    networkx = LazyImport('networkx', globals(), 'networkx')

__all__ = ('networkx',)
