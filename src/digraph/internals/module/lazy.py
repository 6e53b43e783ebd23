from importlib import import_module
from types import ModuleType


class LazyImport(ModuleType):
    """Module stand-in that imports the real module on first attribute access

    Keeps ``import digraph`` and ``digraph --version`` free of the cost of
    importing networkx and rich, which only the interop and CLI table code
    needs.
    """

    def __init__(self, local_name, parent_module_globals, name, attr=None):
        self._local_name = local_name
        self._parent_module_globals = parent_module_globals
        self._attr = attr

        super().__init__(name)

    def _load(self):
        module = import_module(self.__name__)
        resolved = module if self._attr is None else getattr(module, self._attr)
        # Later lookups through the parent module hit the real module directly
        self._parent_module_globals[self._local_name] = resolved

        # Lookups through a kept reference to this object skip __getattr__
        self.__dict__.update(resolved.__dict__)
        return resolved

    def __getattr__(self, item):
        module = self._load()
        return getattr(module, item)

    def __dir__(self):
        module = self._load()
        return dir(module)
