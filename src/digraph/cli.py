"""
.. highlight:: console

============================
The CLI interface of digraph
============================

Examples
--------

Example argument lines (only preceded by ``digraph`` or ``python3 -m digraph``)::

    # print the edges of a graph stored as an edge list
    digraph graph print mediumDG.txt

    # list its strongly connected components
    digraph components print mediumDG.txt

Entrypoints and Subcommands
---------------------------

The ``digraph`` console script is defined in ``setup.py`` and maps to :func:`main`.

On Logging
----------

As a CLI we are at the top, interacting with the user. Library modules only create
loggers (``logging.getLogger(__name__)``) and never configure them. The ``--verbose``
option installs a basic handler here and lowers the level of the ``digraph`` logger
to show their debug messages, including those from reading the input graph.

Definitions
===========
"""

import argparse
import logging
import sys
import warnings
from collections import namedtuple
from pathlib import Path
from textwrap import dedent

import digraph

formatter = argparse.ArgumentDefaultsHelpFormatter


def warnings_formatter(message, *args, **kwargs):
    return f'Warning: {message}\n'


warnings.formatwarning = warnings_formatter


def error(exception):
    """Raise the exception with no traceback printed

    Used for non-recoverables in CLI. Exceptions giving traceback are bugs!
    """

    def exc_only_hook(exception_type, exception, traceback):
        print(f'{exception_type.__name__}: {exception}')

    sys.excepthook = exc_only_hook
    raise exception


def format_keyval_pairs(data_dict, sort=True, right_just=False):
    """Formats lines from *data_dict*."""

    if not data_dict:
        return []

    key_width = max(len(field) for field in data_dict.keys())
    if sort:
        data_dict = dict(sorted(data_dict.items()))
    if right_just:
        line_format = '  %%%ds\t%%s' % key_width
    else:
        line_format = '%%-%ds\t%%s' % key_width

    return [line_format % (key, value) for key, value in data_dict.items()]


def graph_print(args):
    """Subcommand to print the edges of a graph."""
    print(read_graph(args.graph), end='')


def graph_info(args):
    """Subcommand to print the size of a graph."""
    graph = read_graph(args.graph)
    lines = format_keyval_pairs(
        {
            'vertices': graph.get_number_of_vertexes(),
            'edges': graph.get_number_of_edges(),
        },
        sort=False,
    )
    print('\n'.join(lines))


def graph_invert(args):
    """Subcommand to invert a graph and print or write it."""
    inverted = read_graph(args.graph).invert()
    if args.output_file is None:
        print(inverted, end='')
        return

    path = args.output_file
    if path.exists() and not args.force:
        error(FileExistsError(f'Output file {str(path)!r} already exists (use --force)'))
    try:
        digraph.write_directed_graph(inverted, path)
    except OSError as e:
        error(e)
    print(f'Inverted graph written to {path}')


def components_print(args):
    """Subcommand to print the strongly connected components of a graph."""
    sc = digraph.StrongComponents(read_graph(args.graph))
    if args.table:
        sc.print_table()
    else:
        print(sc.number_of_components())
        print(sc, end='')


def info(args):
    """Subcommand to print digraph info."""

    Install = namedtuple('VersionInfo', ['version', 'directory'])
    inst = Install(
        digraph.__version__,
        str(Path(digraph.__file__).resolve().parent),
    )

    lines = format_keyval_pairs(inst._asdict(), right_just=True)
    print('\n'.join(lines))


def check_input_path(path):
    """Resolves path to input file and checks existence.

    Raises if not found or is dir, without tracebacks (see :func:`error`).
    """
    path = Path(path).resolve()

    if not path.exists():
        error(FileNotFoundError('No such input file: %r' % str(path)))
    elif path.is_dir():
        error(IsADirectoryError('Is a directory (not an input file): %r' % str(path)))
    else:
        return path


def read_graph(path):
    """Returns :class:`~digraph.graph.DirectedGraph` read from edge list at *path*.

    Called by the subcommands, after logging has been configured, so that loading
    messages show with ``--verbose``.
    """
    try:
        return digraph.read_directed_graph(path)
    except digraph.GraphFormatError as e:
        error(e)


# for commands taking one graph file as input
args_graph_input = argparse.ArgumentParser(add_help=False)
group_graph_input = args_graph_input.add_argument_group(title='graph')
group_graph_input.add_argument(
    'graph', metavar='FILE', type=check_input_path, help='input edge list file'
)

# for commands with file output
args_output = argparse.ArgumentParser(add_help=False)
group_output = args_output.add_argument_group(title='outputs')
group_output.add_argument(
    '-f', '--force', action='store_true', help='overwrite existing destination file'
)
group_output.add_argument(
    '-o', '--output_file', dest='output_file', metavar='file', type=Path, help='output file'
)

parser_definition = [
    {'info': {'help': 'Show digraph information', 'func': info}},
    {
        'graph': {
            'subs': [
                {
                    'print': {
                        'help': 'Print edges',
                        'description': 'Print all edges of a graph with their weights.',
                        'func': graph_print,
                        'parents': [args_graph_input],
                    }
                },
                {
                    'info': {
                        'help': 'Print graph size',
                        'description': 'Print the number of vertices and edges of a graph.',
                        'func': graph_info,
                        'parents': [args_graph_input],
                    }
                },
                {
                    'invert': {
                        'help': 'Invert graph',
                        'description': 'Reverse the direction of all edges of a graph.',
                        'func': graph_invert,
                        'parents': [args_graph_input, args_output],
                    }
                },
            ],
            'help': 'Graph inspection and manipulation',
            'title': 'digraph graph commands',
            'metavar': 'ACTION',
        }
    },
    {
        'components': {
            'subs': [
                {
                    'print': {
                        'help': 'Print strongly connected components',
                        'description': 'Print the number of strongly connected components '
                        'followed by the vertices of each component.',
                        'func': components_print,
                        'parents': [args_graph_input],
                        'args': [
                            {
                                'name': '--table',
                                'action': 'store_true',
                                'help': 'Show components as a table',
                            },
                        ],
                    }
                },
            ],
            'help': 'Strongly connected components',
            'title': 'digraph component commands',
            'metavar': 'ACTION',
        }
    },
]


def generate_parsers(parsers):
    for command in parser_definition:
        ((cmd_name, cmd_dict),) = command.items()
        cmd_parser = parsers.add_parser(
            cmd_name, allow_abbrev=True, help=cmd_dict['help'], formatter_class=formatter
        )
        if 'subs' in cmd_dict:
            subs = cmd_parser.add_subparsers(title=cmd_dict['title'], metavar=cmd_dict['metavar'])
            for sub_command in cmd_dict['subs']:
                ((sub_name, sub_dict),) = sub_command.items()
                args = sub_dict.pop('args', [])
                func = sub_dict.pop('func')

                sub_parser = subs.add_parser(sub_name, **sub_dict, formatter_class=formatter)
                for arg in args:
                    name = arg.pop('name')
                    sub_parser.add_argument(name, **arg)
                sub_parser.set_defaults(func=func)
        else:
            cmd_parser.set_defaults(func=cmd_dict['func'])


parser = argparse.ArgumentParser(
    prog='digraph',
    description=dedent(
        """
    Welcome to the command line interface of digraph!

    Functionality is split into various subcommands
        - try --help after a COMMAND
        - all keyword arguments can be abbreviated if unique


    """
    ).strip(),
    epilog=dedent(
        """
        Examples:
            # print edges of a graph
            digraph graph print tinyDG.txt

            # strongly connected components
            digraph components print tinyDG.txt

            # version/install information
            digraph info
    """
    ).strip(),
    formatter_class=formatter,
    allow_abbrev=True,
)
parser.add_argument('--version', action='version', version=digraph.__version__)
parser.add_argument('-v', '--verbose', action='store_true', help='show debug log messages')

# subcommand parsers
subparsers = parser.add_subparsers(title='digraph commands', metavar='COMMAND')
generate_parsers(subparsers)


# -- entry point of CLI (digraph) ---------------------------------------------------------


def main(args=None):
    """Entry point of ``digraph`` CLI util and ``python3 -m digraph`` (via ``__main__.py``)."""
    # parse
    args = parser.parse_args(args)
    if args.verbose:
        logging.basicConfig(format='%(levelname)s %(name)s: %(message)s')
        logging.getLogger('digraph').setLevel(logging.DEBUG)
    # dispatch subcommand
    if 'func' in args:
        args.func(args)
    else:
        parser.print_usage()
