"""Position-string (FEN) parsing and serialization."""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move_generator import EN_PASSANT_RANKS
from kingside.core.piece import Piece
from kingside.core.types import Square, make_square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def parse_position(fen: str) -> tuple[Board, Color]:
    """Parse a position string into a board and the side to move.

    Raises ``ValueError`` describing the first malformed field.
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        raise ValueError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    # 3. Castling (parsed first so the board is built with its rights)
    castling = CastlingRights.NONE
    if castling_part != "-":
        if not castling_part:
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or castling & right:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            castling |= right

    board = Board(castling)
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 4. En passant
    if ep_part != "-":
        ep = parse_square(ep_part)
        if ep.rank != EN_PASSANT_RANKS[side]:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        passed = Square(ep.file, ep.rank - side.forward)
        passed_pawn = Piece(side.opposite, PieceType.PAWN)
        if board[ep] is not None or board[passed] != passed_pawn:
            raise ValueError(
                f"Invalid FEN en-passant square (no pawn passed it): {ep_part!r}"
            )
        board.en_passant_target = ep

    # 5–6. Clocks: validated, not retained
    if not _is_count(halfmove_part):
        raise ValueError(f"Invalid FEN halfmove clock: {halfmove_part!r}")
    if not _is_count(fullmove_part):
        raise ValueError(f"Invalid FEN fullmove number: {fullmove_part!r}")

    return board, side


def _is_count(text: str) -> bool:
    return text.isascii() and text.isdigit()


def format_position(
    board: Board, turn: Color, halfmove: int = 0, fullmove: int = 1
) -> str:
    """Serialise *board* with *turn* to move."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if board.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep: Square | None = board.en_passant_target
    ep_str = square_name(ep) if ep is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {halfmove} {fullmove}"
