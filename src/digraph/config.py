"""Configuration of digraph

Options are read once, when digraph is imported, from the ``[digraph]`` section of
an INI file called ``digraph.conf``. The first file found is used, searching

1. the directory named by the environment variable ``DIGRAPHCONFIGPATH``
2. the user configuration directory
3. the site configuration directory

Setting ``DIGRAPHNOCONFIGFILE=1`` makes digraph ignore the file.
"""

import configparser
import os
import warnings
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional

import appdirs

APPNAME = 'digraph'
FILENAME = 'digraph.conf'
PATH_VARIABLE = 'DIGRAPHCONFIGPATH'
DISABLE_VARIABLE = 'DIGRAPHNOCONFIGFILE'


def config_file_enabled() -> bool:
    return os.getenv(DISABLE_VARIABLE, '0').strip() in ('', '0')


def search_paths() -> Iterator[Path]:
    """Candidate configuration files, most important first

    A directory given in the environment replaces the standard locations and
    must contain the file.
    """
    directory = os.getenv(PATH_VARIABLE)
    if directory is not None:
        path = Path(directory) / FILENAME
        if not path.is_file():
            raise ValueError(f'{PATH_VARIABLE} is set to {directory!r} but it holds no {FILENAME}')
        yield path
        return
    yield Path(appdirs.user_config_dir(APPNAME)) / FILENAME
    yield Path(appdirs.site_config_dir(APPNAME)) / FILENAME


def find_config_file() -> Optional[Path]:
    return next((path for path in search_paths() if path.is_file()), None)


def read_config_file(path: Optional[Path] = None) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path is None:
        path = find_config_file()
    if path is not None:
        parser.read(path)
    return parser


config_file = read_config_file()


def non_negative(value) -> bool:
    return value >= 0


class ConfigItem:
    """An option of a :class:`Configuration`

    Assigned values are converted with *cls*, so the strings of a configuration
    file end up with the type of the default. If *valid* is given it must accept
    the converted value.
    """

    def __init__(self, default, description, cls=None, valid: Optional[Callable] = None):
        self.default = default
        self.__doc__ = description
        self.cls = type(default) if cls is None else cls
        self.valid = valid

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance, value):
        try:
            converted = self.cls(value)
        except ValueError as exc:
            raise TypeError(
                f'Configuration item {self.name} needs a {self.cls.__name__}, '
                f'cannot use {value!r}'
            ) from exc
        if self.valid is not None and not self.valid(converted):
            raise ValueError(f'Invalid value for configuration item {self.name}: {converted!r}')
        instance.__dict__[self.name] = converted


class Configuration:
    """Options of one part of digraph

    Subclasses name their INI section in *module* and declare the options as
    :class:`ConfigItem` class attributes. Values from the configuration file
    override the defaults; unknown keys are warned about and skipped.
    """

    module: str

    def __init__(self, parser: Optional[configparser.ConfigParser] = None):
        if parser is None:
            parser = config_file
        if not config_file_enabled() or not parser.has_section(self.module):
            return
        options = self.options()
        for key, value in parser.items(self.module):
            if key in options:
                setattr(self, key, value)
            else:
                warnings.warn(f'Unknown option {key!r} in section [{self.module}] of {FILENAME}')

    @classmethod
    def options(cls) -> Dict[str, ConfigItem]:
        return {
            name: item
            for klass in reversed(cls.__mro__)
            for name, item in vars(klass).items()
            if isinstance(item, ConfigItem)
        }

    def __str__(self):
        return ''.join(f'{name}:\t{getattr(self, name)}\n' for name in self.options())


_unset = object()


class ConfigurationContext:
    """Context to temporarily set configuration options

    Examples
    --------
    >>> from digraph import conf
    >>> with ConfigurationContext(conf, weight_decimals=3):
    ...     conf.weight_decimals
    3
    """

    def __init__(self, config: Configuration, **kwargs):
        unknown = set(kwargs) - set(config.options())
        if unknown:
            raise AttributeError(f'No configuration options {sorted(unknown)}')
        self.config = config
        self.options = kwargs

    def __enter__(self):
        self.saved = {key: self.config.__dict__.get(key, _unset) for key in self.options}
        for key, value in self.options.items():
            setattr(self.config, key, value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for key, value in self.saved.items():
            if value is _unset:
                self.config.__dict__.pop(key, None)
            else:
                self.config.__dict__[key] = value
