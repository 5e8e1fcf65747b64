"""Board rules for the 3x3 game.

Boards are lists of nine strings, ``''`` marking an empty cell. Every
function here is pure: nothing is mutated in place and nothing knows about
rooms or connections.
"""
from typing import List, Optional, Sequence, Tuple

EMPTY = ''
BOARD_SIZE = 9
SYMBOLS: Tuple[str, str] = ('\U0001fa84', '\U0001f9d9')

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> List[str]:
    return [EMPTY] * BOARD_SIZE


def is_valid_index(index) -> bool:
    # bool is an int subclass but never a cell index
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE


def apply_move(board: Sequence[str], index: int, symbol: str) -> List[str]:
    """Return a copy of ``board`` with ``symbol`` placed at ``index``.

    The caller is expected to have checked that the index is valid and the
    cell is empty.
    """
    new_board = list(board)
    new_board[index] = symbol
    return new_board


def check_winner(board: Sequence[str]) -> Optional[str]:
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return board[a]
    return None


def is_full(board: Sequence[str]) -> bool:
    return all(cell != EMPTY for cell in board)


def is_draw(board: Sequence[str]) -> bool:
    return is_full(board) and check_winner(board) is None


def other_symbol(symbol: str, symbols: Tuple[str, str] = SYMBOLS) -> str:
    first, second = symbols
    return second if symbol == first else first
