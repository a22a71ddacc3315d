"""Data shapes exchanged with the network transport."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from kingside.core.types import Square

_MOVE_FORMAT = struct.Struct("4b")


@dataclass(frozen=True, slots=True)
class MoveMessage:
    """A committed move: source file/rank, destination file/rank (0–7 each)."""

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        for name in ("x1", "y1", "x2", "y2"):
            value = getattr(self, name)
            if not 0 <= value <= 7:
                raise ValueError(f"Move coordinate {name}={value} out of range")

    @classmethod
    def from_squares(cls, from_sq: Square, to_sq: Square) -> MoveMessage:
        return cls(from_sq.file, from_sq.rank, to_sq.file, to_sq.rank)

    @property
    def source(self) -> Square:
        return Square(self.x1, self.y1)

    @property
    def destination(self) -> Square:
        return Square(self.x2, self.y2)

    def to_bytes(self) -> bytes:
        return _MOVE_FORMAT.pack(self.x1, self.y1, self.x2, self.y2)

    @classmethod
    def from_bytes(cls, data: bytes) -> MoveMessage:
        if len(data) != _MOVE_FORMAT.size:
            raise ValueError(
                f"Move message must be {_MOVE_FORMAT.size} bytes, got {len(data)}"
            )
        return cls(*_MOVE_FORMAT.unpack(data))


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    """Sent by a client when it joins a networked game."""

    name: str


@dataclass(frozen=True, slots=True)
class GameInfo:
    """Sent to each player when a networked game starts."""

    other_player: str
    is_black: bool
