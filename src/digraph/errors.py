class GraphError(Exception):
    """Exception for errors in graph objects"""

    pass


class UnknownVertexError(GraphError, LookupError):
    """Exception for lookups of a vertex that is not in the graph"""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f'vertex {vertex!r} is not in graph')


class InvalidEdgeError(GraphError, LookupError):
    """Exception for lookups of an edge that is not in the graph"""

    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(f'edge {source!r} -> {target!r} is not in graph')


class GraphFormatError(GraphError):
    """Exception for malformed edge list input"""

    def __init__(self, msg='malformed edge list'):
        super().__init__(msg)
