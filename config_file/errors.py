"""Exceptions raised while loading configuration files.

Every failure surfaces as a subclass of :class:`ConfigFileError`, so callers
can catch the whole family with one ``except`` clause or pick out the kind
they care about.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .formats import ConfigFormat


class ConfigFileError(Exception):
    """Base exception for configuration file errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class UnsupportedExtensionError(ConfigFileError):
    """Exception raised when no enabled format matches the file extension."""

    def __init__(self, extension: str, path: Optional[Path] = None):
        self.extension = extension
        shown = f".{extension}" if extension else "no extension"
        message = f"don't know how to parse file ({shown})"
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message, path)


class FileLoadError(ConfigFileError):
    """Exception raised when the configuration file cannot be read."""

    def __init__(self, path: Path, cause: OSError):
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"couldn't read config file {path}: {reason}", path)

    @property
    def errno(self) -> Optional[int]:
        return self.cause.errno


class ParseError(ConfigFileError):
    """Exception raised when a decoder rejects the file contents.

    Covers both syntax errors reported by the format library and structural
    mismatches reported while building the target type. ``detail`` holds the
    original diagnostic untouched.
    """

    def __init__(self, format: "ConfigFormat", path: Path, cause: Exception):
        self.format = format
        self.cause = cause
        self.detail = str(cause)
        super().__init__(
            f"couldn't parse {format.label} file {path}: {self.detail}", path
        )
