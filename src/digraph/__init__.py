r"""
=======
digraph
=======

digraph is a python package for weighted directed graphs and their strongly
connected components.

Configuration
=============

.. list-table:: digraph configuration options
   :widths: 25 25 50 150
   :header-rows: 1

   * - Option name
     - Default value
     - Type
     - Description
   * - ``default_weight``
     - ``1.0``
     - float
     - Weight given to edges read from edge list files
   * - ``weight_decimals``
     - ``1``
     - int
     - Number of decimals used when rendering edge weights


Definitions
===========
"""

__version__ = '0.3.0'

import digraph.config as config


class DigraphConfiguration(config.Configuration):
    module = 'digraph'
    default_weight = config.ConfigItem(
        1.0,
        'Weight given to edges read from edge list files',
        cls=float,
        valid=config.non_negative,
    )
    weight_decimals = config.ConfigItem(
        1,
        'Number of decimals used when rendering edge weights',
        cls=int,
        valid=config.non_negative,
    )


conf = DigraphConfiguration()

from .components import StrongComponents, strong_components  # noqa: E402
from .errors import (  # noqa: E402
    GraphError,
    GraphFormatError,
    InvalidEdgeError,
    UnknownVertexError,
)
from .graph import DirectedGraph  # noqa: E402
from .io import parse_directed_graph, read_directed_graph, write_directed_graph  # noqa: E402
from .order import DepthFirstOrder, post_order  # noqa: E402

__all__ = (
    'DepthFirstOrder',
    'DirectedGraph',
    'GraphError',
    'GraphFormatError',
    'InvalidEdgeError',
    'StrongComponents',
    'UnknownVertexError',
    'conf',
    'parse_directed_graph',
    'post_order',
    'read_directed_graph',
    'strong_components',
    'write_directed_graph',
)
