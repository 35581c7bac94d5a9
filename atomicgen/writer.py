"""
Template reading and the regeneration gate.

Generated documents are written only when their bytes differ from the
current destination, so rerunning the generator on unchanged templates
leaves destinations (and their modification times) untouched.
"""

from pathlib import Path
from typing import Optional, Union

from .utils.exceptions import DestinationWriteError, TemplateReadError
from .utils.logging import GeneratorLogger

_log = GeneratorLogger(__name__)

PathLike = Union[str, Path]

ENCODING = "utf-8"


def read_template(path: PathLike) -> str:
    """
    Read a template document.

    Raises:
        TemplateReadError: if the file cannot be read or decoded
    """
    path = Path(path)
    try:
        return path.read_text(encoding=ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(str(path), str(e)) from e


def _read_existing(path: Path) -> Optional[bytes]:
    try:
        return path.read_bytes()
    except OSError as e:
        # an unreadable destination is treated as having no prior output
        _log.logger.debug(f"No prior output at {path}: {e}")
        return None


def is_up_to_date(path: PathLike, content: str) -> bool:
    """Whether ``path`` already holds exactly ``content``."""
    return _read_existing(Path(path)) == content.encode(ENCODING)


def write_if_changed(path: PathLike, content: str) -> bool:
    """
    Write ``content`` to ``path`` unless it is already there.

    Returns:
        True if the file was written, False if the write was skipped

    Raises:
        DestinationWriteError: if the destination cannot be written
    """
    path = Path(path)
    data = content.encode(ENCODING)

    if _read_existing(path) == data:
        _log.log_write_skipped(str(path))
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise DestinationWriteError(str(path), str(e)) from e

    _log.log_write(str(path), len(data))
    return True
