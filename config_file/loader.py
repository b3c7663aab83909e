"""Configuration file loader.

Reads a configuration file, picks its format from the file extension and
validates the decoded content into a caller-supplied type with pydantic.

Example::

    from pydantic import BaseModel
    from config_file import load_config

    class Config(BaseModel):
        host: str

    config = load_config("/etc/myconfig.toml", Config)
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .codecs import CODECS, build_registry
from .errors import ParseError, UnsupportedExtensionError
from .formats import ConfigFormat
from .settings import LoaderSettings
from .source import ConfigSource, RawLoader

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, os.PathLike]


class ConfigLoader:
    """Loads configuration files into typed objects.

    Supports:
    - TOML files (always)
    - JSON files
    - YAML files (``.yaml`` and ``.yml``) when PyYAML is installed
    - XML files when xmltodict is installed

    The target can be anything pydantic validates: models, dataclasses,
    TypedDicts or plain containers. Loaders hold no per-call state and can be
    shared between threads.
    """

    def __init__(self, settings: Optional[LoaderSettings] = None):
        """Initialize the loader.

        Args:
            settings: Enabled formats and validation mode (defaults if None)
        """
        self.settings = settings or LoaderSettings()
        self.registry = build_registry(self.settings.formats)
        self.raw_loader = RawLoader()

    def load(self, file_path: PathLike, target: type[T]) -> T:
        """Load a configuration file into *target*.

        Args:
            file_path: Path to the configuration file
            target: Type to build from the file content

        Returns:
            A fully populated instance of *target*

        Raises:
            UnsupportedExtensionError: If no enabled format owns the extension
            FileLoadError: If the file cannot be read
            ParseError: If decoding or validation fails
        """
        path = Path(file_path)
        format = self.detect_format(path)
        source = self.raw_loader.read(path)
        config = self.parse(source, format, target)
        logger.debug(f"Loaded configuration from {path} ({format.value})")
        return config

    def detect_format(self, path: Path) -> ConfigFormat:
        """Resolve the format of *path* from its extension.

        Raises:
            UnsupportedExtensionError: If the extension is missing or unknown
        """
        extension = path.suffix[1:]
        try:
            return self.registry.resolve(extension)
        except UnsupportedExtensionError as e:
            raise UnsupportedExtensionError(e.extension, path) from None

    def parse(self, source: ConfigSource, format: ConfigFormat, target: type[T]) -> T:
        """Decode *source* as *format* and validate it into *target*.

        Raises:
            ParseError: If the decoder or the validation rejects the content
        """
        codec = CODECS[format]

        try:
            data: Any = codec.decode(source.content)
        except codec.errors() as e:
            raise ParseError(format, source.path, e) from e

        data = codec.prepare(data, target)

        try:
            return TypeAdapter(target).validate_python(data, strict=self.settings.strict)
        except ValidationError as e:
            raise ParseError(format, source.path, e) from e


def load_config(file_path: PathLike, target: type[T]) -> T:
    """Load a configuration file into *target* using default settings.

    See :meth:`ConfigLoader.load`.
    """
    return ConfigLoader().load(file_path, target)


class FromConfigFile:
    """Mixin giving a model or dataclass a ``from_config_file`` constructor.

    Example::

        class Config(FromConfigFile, BaseModel):
            host: str

        config = Config.from_config_file("app.yaml")
    """

    @classmethod
    def from_config_file(cls: type[T], file_path: PathLike) -> T:
        return load_config(file_path, cls)
