"""Tests for transport message shapes."""

import pytest

from kingside.core.types import E2, E4, G8, H1
from kingside.game.protocol import GameInfo, MoveMessage, PlayerInfo


class TestMoveMessage:
    def test_from_squares(self) -> None:
        msg = MoveMessage.from_squares(E2, E4)
        assert (msg.x1, msg.y1, msg.x2, msg.y2) == (4, 1, 4, 3)
        assert msg.source == E2
        assert msg.destination == E4

    @pytest.mark.parametrize("coords", [(-1, 0, 0, 0), (0, 8, 0, 0), (0, 0, 0, 9)])
    def test_out_of_range_rejected(self, coords: tuple[int, int, int, int]) -> None:
        with pytest.raises(ValueError, match="out of range"):
            MoveMessage(*coords)

    def test_bytes_layout(self) -> None:
        assert MoveMessage.from_squares(H1, G8).to_bytes() == bytes([7, 0, 6, 7])

    def test_from_bytes(self) -> None:
        msg = MoveMessage.from_bytes(bytes([4, 1, 4, 3]))
        assert msg == MoveMessage.from_squares(E2, E4)

    def test_from_bytes_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="4 bytes"):
            MoveMessage.from_bytes(b"\x00\x01\x02")

    def test_from_bytes_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            MoveMessage.from_bytes(bytes([0, 0, 0, 12]))

    def test_frozen(self) -> None:
        msg = MoveMessage(0, 0, 0, 1)
        with pytest.raises(AttributeError):
            msg.x1 = 3  # type: ignore[misc]


class TestGameInfo:
    def test_fields(self) -> None:
        info = GameInfo(other_player="Remote", is_black=True)
        assert info.other_player == "Remote"
        assert info.is_black

    def test_player_info(self) -> None:
        assert PlayerInfo("Ann").name == "Ann"
