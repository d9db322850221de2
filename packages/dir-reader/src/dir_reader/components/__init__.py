from .depth import path_depth
from .options import DirProbe, WalkOptions
from .predicate import is_dir, probe_dir
from .reader import StringArrayReader, StringIOReader
from .walker import new_file_dir_reader, should_prune

__all__ = [
    "DirProbe",
    "StringArrayReader",
    "StringIOReader",
    "WalkOptions",
    "is_dir",
    "new_file_dir_reader",
    "path_depth",
    "probe_dir",
    "should_prune",
]
