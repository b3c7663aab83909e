"""Configuration formats and extension resolution."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import UnsupportedExtensionError

logger = logging.getLogger(__name__)


class ConfigFormat(str, Enum):
    """Supported configuration file formats."""

    TOML = "toml"
    JSON = "json"
    XML = "xml"
    YAML = "yaml"

    @property
    def label(self) -> str:
        return self.name


class FormatRegistry:
    """Maps file extensions onto the enabled configuration formats.

    The table is fixed at construction. Each extension belongs to exactly one
    format; a format may own several extensions (``yaml`` and ``yml``).
    Extensions of formats that were not passed in are simply unknown.
    """

    def __init__(self, table: Mapping[ConfigFormat, Iterable[str]]):
        """Initialize the registry.

        Args:
            table: Extensions (without the leading dot) owned by each enabled format

        Raises:
            ValueError: If two formats claim the same extension
        """
        extensions: dict[str, ConfigFormat] = {}
        for format, owned in table.items():
            for extension in owned:
                key = extension.lower()
                claimed = extensions.get(key)
                if claimed is not None and claimed is not format:
                    raise ValueError(
                        f"Extension '{key}' claimed by both {claimed.label} and {format.label}"
                    )
                extensions[key] = format

        self._extensions = MappingProxyType(extensions)
        self._formats = frozenset(table)

    @property
    def formats(self) -> frozenset[ConfigFormat]:
        return self._formats

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(sorted(self._extensions))

    def __contains__(self, extension: object) -> bool:
        if not isinstance(extension, str):
            return False
        return _normalize(extension) in self._extensions

    def __repr__(self) -> str:
        formats = ", ".join(sorted(f.label for f in self._formats))
        return f"FormatRegistry({formats})"

    def resolve(self, extension: str) -> ConfigFormat:
        """Return the format owning *extension*.

        Matching is case-insensitive and tolerates a single leading dot.

        Raises:
            UnsupportedExtensionError: If the extension is empty or unknown
        """
        bare = _strip_dot(extension)
        key = bare.lower()
        try:
            format = self._extensions[key]
        except KeyError:
            raise UnsupportedExtensionError(bare) from None

        logger.debug(f"Resolved extension '{key}' to {format.label}")
        return format


def _strip_dot(extension: str) -> str:
    if extension.startswith("."):
        return extension[1:]
    return extension


def _normalize(extension: str) -> str:
    return _strip_dot(extension).lower()
