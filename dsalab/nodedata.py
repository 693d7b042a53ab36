"""A small comparable value holding one string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True, order=True)
class NodeData:
    """A string payload ordered and compared by its text."""

    data: str = ""

    @classmethod
    def from_stream(cls, stream: TextIO) -> NodeData:
        """Read one line from stream, without its line ending.

        Raises EOFError when the stream has nothing left.
        """
        line = stream.readline()
        if line == "":
            raise EOFError("no more data")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return cls(line)

    def __str__(self) -> str:
        return self.data