import logging
import os
import stat

from .options import DirProbe

logger = logging.getLogger(__name__)


def probe_dir(path: str | os.PathLike[str]) -> DirProbe:
    """
    Classify *path* as a directory, a non-directory, or unknown when the
    probe itself failed (missing entry, permission error, invalid path).
    Symlinks are followed.
    """
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError) as e:
        logger.debug("probe_dir: cannot stat %s: %s", path, e)
        return DirProbe.UNKNOWN
    return DirProbe.DIRECTORY if stat.S_ISDIR(mode) else DirProbe.NOT_DIRECTORY


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* is a directory; any probe error reads as False."""
    return probe_dir(path) is DirProbe.DIRECTORY
