import os


def path_depth(path: str | os.PathLike[str]) -> int:
    """
    Return the depth of *path* as the number of its components.

    The path is normalised lexically first, so redundant and trailing
    separators do not add components and ``.``/``..`` are folded where
    ``os.path.normpath`` folds them. Empty components (the leading
    separator of an absolute path, a bare filesystem root) are not counted.

    The result is never below 1: ``""``, ``"."``, ``"a"`` and ``"/"`` all
    have depth 1.
    """
    normalized = os.path.normpath(os.fspath(path))
    parts = [part for part in normalized.split(os.sep) if part]
    return max(len(parts), 1)
