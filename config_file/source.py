"""Raw file access for configuration loading."""

import errno
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import FileLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigSource:
    """Path and raw byte content of one configuration file."""

    path: Path
    content: bytes

    def __len__(self) -> int:
        return len(self.content)


class RawLoader:
    """Reads configuration files from disk, whole or not at all."""

    def read(self, file_path: Union[str, os.PathLike]) -> ConfigSource:
        """Read the complete content of a configuration file.

        Args:
            file_path: Path to a regular file

        Returns:
            The file path together with its bytes

        Raises:
            FileLoadError: If the file is missing, unreadable or not a regular file
        """
        path = Path(file_path)

        try:
            mode = path.stat().st_mode
            if not stat.S_ISREG(mode):
                raise OSError(_not_regular_errno(mode), "Not a regular file", str(path))
            content = path.read_bytes()
        except OSError as e:
            raise FileLoadError(path, e) from e
        except ValueError as e:
            # pathlib rejects paths with embedded NUL bytes before any system call
            cause = OSError(errno.EINVAL, str(e), str(path))
            raise FileLoadError(path, cause) from e

        logger.debug(f"Read {len(content)} bytes from {path}")
        return ConfigSource(path=path, content=content)


def _not_regular_errno(mode: int) -> int:
    return errno.EISDIR if stat.S_ISDIR(mode) else errno.EINVAL
