from dir_reader.components import (
    DirProbe,
    StringArrayReader,
    StringIOReader,
    WalkOptions,
    is_dir,
    new_file_dir_reader,
    path_depth,
    probe_dir,
)
from dir_reader.read_dir import list_files, read_dir

__all__ = [
    "DirProbe",
    "StringArrayReader",
    "StringIOReader",
    "WalkOptions",
    "is_dir",
    "list_files",
    "new_file_dir_reader",
    "path_depth",
    "probe_dir",
    "read_dir",
]
