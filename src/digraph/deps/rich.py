from typing import TYPE_CHECKING

from digraph.internals.module.lazy import LazyImport

if TYPE_CHECKING:
    import rich.box as box
    import rich.console as console
    import rich.table as table
else:
    box = LazyImport('box', globals(), 'rich.box')
    console = LazyImport('console', globals(), 'rich.console')
    table = LazyImport('table', globals(), 'rich.table')
