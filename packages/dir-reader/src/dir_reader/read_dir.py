"""
DirReader - collects the files below a directory, optionally recursing into
subdirectories up to a depth limit.

Depth is the number of path components, so a directory's depth below the
root is ``path_depth(dir) - path_depth(root)``. With recursion enabled, a
directory whose depth below the root reaches ``max_depth`` is not entered:

    root/                 depth 0  -> listed
    ├── a.txt
    └── sub/              depth 1  -> listed when max_depth >= 2
        ├── c.txt
        └── sub/          depth 2  -> listed when max_depth >= 3
            └── d.txt

Usage (library):
    from dir_reader.read_dir import list_files
    paths = list_files("/path/to/dir", recursive=True, max_depth=2)
"""

import os

from dir_reader.components.options import WalkOptions
from dir_reader.components.reader import StringArrayReader
from dir_reader.components.walker import new_file_dir_reader


def read_dir(options: WalkOptions) -> StringArrayReader:
    """Walk ``options.root_dir`` and return a reader over the file paths found."""
    return new_file_dir_reader(options.root_dir, options.recursive, options.max_depth)


def list_files(
    root_dir: str | os.PathLike[str],
    recursive: bool = False,
    max_depth: int = 1,
) -> list[str]:
    """Same as :func:`read_dir`, returning a plain list."""
    options = WalkOptions(root_dir=root_dir, recursive=recursive, max_depth=max_depth)
    return list(read_dir(options).strings)
