from typing import Iterable, Iterator, TextIO


class StringArrayReader:
    """Ordered, finite and restartable reader over a fixed list of strings.

    The strings are copied into a tuple on construction and never change
    afterwards. ``read_string`` hands them out one at a time and raises
    ``EOFError`` once the sequence is exhausted; ``reset`` rewinds to the
    start.
    """

    def __init__(self, strings: Iterable[str] = ()) -> None:
        self._strings: tuple[str, ...] = tuple(strings)
        self._pos: int = 0

    @property
    def strings(self) -> tuple[str, ...]:
        return self._strings

    def read_string(self) -> str:
        if self._pos >= len(self._strings):
            raise EOFError("no more strings to read")
        value = self._strings[self._pos]
        self._pos += 1
        return value

    def reset(self) -> None:
        self._pos = 0

    def __iter__(self) -> Iterator[str]:
        while self._pos < len(self._strings):
            yield self.read_string()

    def __len__(self) -> int:
        return len(self._strings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringArrayReader):
            return NotImplemented
        return self._strings == other._strings

    def __repr__(self) -> str:
        return f"StringArrayReader({list(self._strings)!r})"


class StringIOReader:
    """Reads newline separated strings from a text stream such as stdin.

    Blank lines are skipped and surrounding whitespace is stripped. The
    stream is consumed as it is read, so this reader cannot be rewound.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_string(self) -> str:
        for line in self._stream:
            value = line.strip()
            if value:
                return value
        raise EOFError("no more strings to read")

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                yield self.read_string()
            except EOFError:
                return
