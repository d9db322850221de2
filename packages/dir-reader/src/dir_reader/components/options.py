import os
from enum import StrEnum

from pydantic import BaseModel, field_validator


class DirProbe(StrEnum):
    DIRECTORY     = "directory"
    NOT_DIRECTORY = "not_directory"
    UNKNOWN       = "unknown"


class WalkOptions(BaseModel):
    root_dir: str
    recursive: bool = False
    max_depth: int = 1

    @field_validator("root_dir", mode="before")
    @classmethod
    def _coerce_path(cls, value: object) -> object:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value
