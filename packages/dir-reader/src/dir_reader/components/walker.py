import logging
import os
import stat

from .depth import path_depth
from .reader import StringArrayReader

logger = logging.getLogger(__name__)


def should_prune(is_root: bool, recursive: bool, current_depth: int, max_depth: int) -> bool:
    """
    Decide whether a directory's subtree is skipped.

    Two independent rules: without recursion every directory but the root is
    skipped, and with recursion a directory is skipped once its depth below
    the root reaches *max_depth*. A skipped directory is never listed, so
    not even the files directly inside it are collected.
    """
    skip_nonrecursive = not recursive and not is_root
    skip_too_deep = recursive and current_depth >= max_depth
    return skip_nonrecursive or skip_too_deep


def new_file_dir_reader(
    root_dir: str | os.PathLike[str],
    recursive: bool,
    max_depth: int,
) -> StringArrayReader:
    """
    Collect every file below *root_dir* into a StringArrayReader.

    The walk is pre-order and visits the entries of each directory sorted
    by name, files and subdirectories interleaved. Directories are entered
    only when *recursive* is set, and only while their depth below the root
    stays under *max_depth*. Symlinks are listed as files, never followed.

    Args:
        root_dir:  Directory to start from. Result paths are built by joining
                   it with entry names, so a relative root gives relative paths.
        recursive: Descend into subdirectories.
        max_depth: Number of directory levels below the root that may be
                   entered; only used when *recursive* is set.

    Returns:
        A reader over the collected file paths.

    Raises:
        OSError: The first error met while statting or listing an entry,
                 unchanged. Nothing is returned on error.
    """
    root = os.fspath(root_dir)
    file_paths: list[str] = []

    # Depth below the root counts only the names joined onto it.
    def _visit_dir(current_path: str, rel_path: str | None) -> None:
        current_depth = 0 if rel_path is None else path_depth(rel_path)
        if should_prune(rel_path is None, recursive, current_depth, max_depth):
            logger.debug("skipping %s (depth %d)", current_path, current_depth)
            return

        with os.scandir(current_path) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            entry_path = os.path.join(current_path, entry.name)
            if entry.is_dir(follow_symlinks=False):
                child_rel = entry.name if rel_path is None else os.path.join(rel_path, entry.name)
                _visit_dir(entry_path, child_rel)
            else:
                file_paths.append(entry_path)

    if stat.S_ISDIR(os.lstat(root).st_mode):
        _visit_dir(root, None)
    else:
        file_paths.append(root)

    logger.info("new_file_dir_reader: found %d files in %s", len(file_paths), root)
    return StringArrayReader(file_paths)
