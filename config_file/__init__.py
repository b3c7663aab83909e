"""Read and parse configuration files, choosing the format from the extension.

TOML is always supported. JSON is supported out of the box, YAML and XML
once their optional extras (``config-file[yaml]``, ``config-file[xml]``) are
installed.
"""

from .errors import ConfigFileError, FileLoadError, ParseError, UnsupportedExtensionError
from .formats import ConfigFormat, FormatRegistry
from .loader import ConfigLoader, FromConfigFile, load_config
from .settings import LoaderSettings
from .source import ConfigSource, RawLoader

__version__ = "0.2.1"

__all__ = [
    "ConfigFileError",
    "ConfigFormat",
    "ConfigLoader",
    "ConfigSource",
    "FileLoadError",
    "FormatRegistry",
    "FromConfigFile",
    "LoaderSettings",
    "ParseError",
    "RawLoader",
    "UnsupportedExtensionError",
    "load_config",
]
