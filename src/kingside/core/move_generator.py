"""Candidate move generation and attack sets.

Everything here ignores whether a move leaves the mover's own king in check;
that filtering happens in :meth:`kingside.core.board.Board.moves`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from kingside.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

KING_HOME_FILE = 4
KINGSIDE_KING_FILE = 6
QUEENSIDE_KING_FILE = 2

# Rank of the en-passant target a pawn of each color may capture onto.
EN_PASSANT_RANKS: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for df, dr in offsets:
            af = sq.file + df
            ar = sq.rank + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(Square(af, ar))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = sq.file + df
            ar = sq.rank + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(Square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Public API -------------------------------------------------------------


def generate_moves(
    board: Board, piece_type: PieceType, sq: Square, color: Color
) -> set[Square]:
    """Destinations reachable by *color*'s *piece_type* standing on *sq*."""
    return _GENERATORS[piece_type](board, sq, color)


def attacked_squares(
    board: Board, piece_type: PieceType, sq: Square, color: Color
) -> set[Square]:
    """Squares the piece on *sq* attacks.

    Same as :func:`generate_moves` except that pawns attack both forward
    diagonals whatever stands there (and never the squares ahead of them),
    and kings never castle.
    """
    if piece_type == PieceType.PAWN:
        return _pawn_attacks(board, sq, color)
    if piece_type == PieceType.KING:
        return _step_targets(board, _KING_TARGETS[sq], color)
    return _GENERATORS[piece_type](board, sq, color)


# -- Piece-specific generators (private) ------------------------------------


def _step_targets(
    board: Board, targets: tuple[Square, ...], color: Color
) -> set[Square]:
    moves: set[Square] = set()
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.add(to_sq)
    return moves


def _sliding(
    board: Board, rays: tuple[tuple[Square, ...], ...], color: Color
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.add(to_sq)
                continue
            if target.color != color:
                moves.add(to_sq)
            break
    return moves


def _gen_rook(board: Board, sq: Square, color: Color) -> set[Square]:
    return _sliding(board, _ROOK_RAYS[sq], color)


def _gen_bishop(board: Board, sq: Square, color: Color) -> set[Square]:
    return _sliding(board, _BISHOP_RAYS[sq], color)


def _gen_queen(board: Board, sq: Square, color: Color) -> set[Square]:
    return _sliding(board, _QUEEN_RAYS[sq], color)


def _gen_knight(board: Board, sq: Square, color: Color) -> set[Square]:
    return _step_targets(board, _KNIGHT_TARGETS[sq], color)


def _gen_king(board: Board, sq: Square, color: Color) -> set[Square]:
    moves = _step_targets(board, _KING_TARGETS[sq], color)
    moves.update(_castling_targets(board, sq, color))
    return moves


def _castling_targets(board: Board, king_sq: Square, color: Color) -> list[Square]:
    rank = color.back_rank
    if king_sq != Square(KING_HOME_FILE, rank):
        return []

    rights = board.can_castle(color)
    opponent = color.opposite
    targets: list[Square] = []

    if (
        rights.long
        and _has_own_rook(board, Square(0, rank), color)
        and all(board[Square(f, rank)] is None for f in range(1, 4))
        and not any(board.threatens(Square(f, rank), opponent) for f in range(2, 5))
    ):
        targets.append(Square(QUEENSIDE_KING_FILE, rank))

    if (
        rights.short
        and _has_own_rook(board, Square(7, rank), color)
        and all(board[Square(f, rank)] is None for f in range(5, 7))
        and not any(board.threatens(Square(f, rank), opponent) for f in range(4, 7))
    ):
        targets.append(Square(KINGSIDE_KING_FILE, rank))

    return targets


def _has_own_rook(board: Board, sq: Square, color: Color) -> bool:
    piece = board[sq]
    return (
        piece is not None
        and piece.color == color
        and piece.piece_type == PieceType.ROOK
    )


def _gen_pawn(board: Board, sq: Square, color: Color) -> set[Square]:
    moves: set[Square] = set()
    d = color.forward
    last_rank = color.opposite.back_rank
    if sq.rank == last_rank:
        return moves
    # Only a target left behind by the opponent can be captured onto.
    ep_rank = EN_PASSANT_RANKS[color]

    for df in (-1, 1):
        file_idx = sq.file + df
        if not 0 <= file_idx < 8:
            continue
        cap_sq = Square(file_idx, sq.rank + d)
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                moves.add(cap_sq)
        elif cap_sq == board.en_passant_target and cap_sq.rank == ep_rank:
            moves.add(cap_sq)

    one_step = Square(sq.file, sq.rank + d)
    if board[one_step] is None:
        moves.add(one_step)
        start_rank = 1 if color == Color.WHITE else 6
        if sq.rank == start_rank:
            two_step = Square(sq.file, sq.rank + 2 * d)
            if board[two_step] is None:
                moves.add(two_step)
    return moves


def _pawn_attacks(board: Board, sq: Square, color: Color) -> set[Square]:
    attacks: set[Square] = set()
    rank_idx = sq.rank + color.forward
    if not 0 <= rank_idx < 8:
        return attacks
    for df in (-1, 1):
        file_idx = sq.file + df
        if not 0 <= file_idx < 8:
            continue
        cap_sq = Square(file_idx, rank_idx)
        target = board[cap_sq]
        if target is None or target.color != color:
            attacks.add(cap_sq)
    return attacks


_GENERATORS: dict[PieceType, Callable[[Board, Square, Color], set[Square]]] = {
    PieceType.KING: _gen_king,
    PieceType.QUEEN: _gen_queen,
    PieceType.BISHOP: _gen_bishop,
    PieceType.KNIGHT: _gen_knight,
    PieceType.ROOK: _gen_rook,
    PieceType.PAWN: _gen_pawn,
}
