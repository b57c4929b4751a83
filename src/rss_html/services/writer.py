"""Atomic HTML file writer."""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, TextIO

from ..core.renderer import FeedRenderer
from ..core.tree import XMLNode


logger = logging.getLogger(__name__)


class HTMLWriter:
    """
    Owns the single output file of a conversion.

    Content is written to a temporary file next to the target and moved into
    place only when the ``with`` block completes. If the block raises, the
    temporary file is closed and removed, so the target is never left
    truncated.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        """
        Initialize the writer.

        Args:
            path: Destination HTML file
            encoding: Text encoding of the output
        """
        self.path = Path(path)
        self.encoding = encoding
        self._temp_file: Optional[TextIO] = None
        self._temp_path: Optional[Path] = None

    def __enter__(self) -> TextIO:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._temp_file = tempfile.NamedTemporaryFile(
            mode='w',
            encoding=self.encoding,
            dir=self.path.parent,
            delete=False,
            suffix='.tmp'
        )
        self._temp_path = Path(self._temp_file.name)
        return self._temp_file

    def _target_mode(self) -> int:
        """Mode of the file being replaced, else 0o666 minus the umask."""
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def __exit__(self, exc_type, exc, tb) -> bool:
        temp_file, temp_path = self._temp_file, self._temp_path
        self._temp_file = self._temp_path = None

        try:
            temp_file.flush()
        finally:
            temp_file.close()

        if exc_type is not None:
            temp_path.unlink(missing_ok=True)
            logger.error(f"Discarded partial output for {self.path}: {exc}")
            return False

        try:
            temp_path.chmod(self._target_mode())
            temp_path.replace(self.path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise OSError(f"Failed to write output file {self.path}: {e}") from e

        logger.debug(f"Wrote {self.path}")
        return False


def write_html(
    path: Path,
    channel: XMLNode,
    renderer: FeedRenderer,
    encoding: str = "utf-8",
) -> int:
    """
    Render a channel into an HTML file.

    Returns:
        Number of item rows written
    """
    with HTMLWriter(path, encoding) as sink:
        return renderer.render(channel, sink)
