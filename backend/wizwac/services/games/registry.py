"""In-memory owner of every live room.

The registry is the only place rooms are stored. Socket handlers resolve
rooms through it for the duration of one event and never keep a reference
afterwards. All reads and writes happen under ``lock`` so that two
connections racing on the same room see one intent applied fully before
the other.

The lock is a plain ``threading.RLock``. Under eventlet or gevent the
standard library must be monkey-patched before this module is imported,
otherwise greenlets share one OS thread and the lock does not exclude them.
"""
import threading
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from wizwac.models import DRAW, Player, Room, generate_room_code
from wizwac.services.games import engine
from wizwac.services.games.errors import (
    AlreadyInRoom,
    CellOccupied,
    GameNotInProgress,
    InvalidMove,
    NotYourTurn,
    RoomFull,
    RoomNotFound,
)


class MoveResult(NamedTuple):
    room: Room
    index: int
    symbol: str
    winner: Optional[str]
    winner_name: Optional[str]

    @property
    def finished(self) -> bool:
        return self.winner is not None


def normalize_code(code) -> Optional[str]:
    if not isinstance(code, str):
        return None
    return code.strip().upper()


class RoomRegistry:
    def __init__(self, app=None, code_generator: Callable[[], str] = generate_room_code,
                 symbols: Tuple[str, str] = engine.SYMBOLS, code_attempts: int = 100):
        self.lock = threading.RLock()
        self.code_generator = code_generator
        self.symbols = symbols
        self.code_attempts = code_attempts
        self._rooms: Dict[str, Room] = {}
        self._room_by_sid: Dict[str, str] = {}
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        """Bind to a Flask app: start empty and pick up symbols from config."""
        with self.lock:
            self._rooms.clear()
            self._room_by_sid.clear()
            self.symbols = (
                app.config.get('SYMBOL_A', engine.SYMBOLS[0]),
                app.config.get('SYMBOL_B', engine.SYMBOLS[1]),
            )
            self.code_attempts = int(app.config.get('ROOM_CODE_ATTEMPTS', self.code_attempts))
        app.extensions['rooms'] = self

    def __len__(self) -> int:
        return len(self._rooms)

    def codes(self) -> List[str]:
        with self.lock:
            return sorted(self._rooms)

    def _new_code(self) -> str:
        # Regenerate on collision instead of overwriting a live room
        for _ in range(max(1, self.code_attempts)):
            code = self.code_generator()
            if code not in self._rooms:
                return code
        raise RuntimeError('Could not generate an unused room code')

    def _ensure_free(self, sid: str) -> None:
        if sid in self._room_by_sid:
            raise AlreadyInRoom()

    def _require(self, code) -> Room:
        room = self.get(code)
        if room is None:
            raise RoomNotFound()
        return room

    def create(self, creator_id: str, creator_name: str) -> Tuple[str, str]:
        with self.lock:
            self._ensure_free(creator_id)
            code = self._new_code()
            room = Room(code, symbols=self.symbols)
            symbol = self.symbols[0]
            room.players.append(Player(creator_id, creator_name, symbol))
            self._rooms[code] = room
            self._room_by_sid[creator_id] = code
            return code, symbol

    def join(self, code, joiner_id: str, joiner_name: str) -> str:
        with self.lock:
            room = self._require(code)
            if room.is_full():
                raise RoomFull()
            self._ensure_free(joiner_id)
            symbol = self.symbols[1]
            room.players.append(Player(joiner_id, joiner_name, symbol))
            self._room_by_sid[joiner_id] = room.code
            return symbol

    def get(self, code) -> Optional[Room]:
        code = normalize_code(code)
        if code is None:
            return None
        with self.lock:
            return self._rooms.get(code)

    def remove(self, code) -> Optional[Room]:
        code = normalize_code(code)
        with self.lock:
            room = self._rooms.pop(code, None)
            if room is not None:
                for player in room.players:
                    self._room_by_sid.pop(player.id, None)
            return room

    def find_by_connection(self, sid: str) -> Optional[Tuple[str, Room]]:
        with self.lock:
            code = self._room_by_sid.get(sid)
            if code is None or code not in self._rooms:
                return None
            return code, self._rooms[code]

    def make_move(self, code, sid: str, index) -> MoveResult:
        """Validate and apply a move by ``sid``.

        The mover's stored symbol is placed; whatever symbol the client
        claims is not trusted. Raises a ``GameError`` subclass and leaves the
        room untouched when the move is rejected.
        """
        with self.lock:
            room = self._require(code)
            player = room.player_by_id(sid)
            if player is None or player.symbol != room.current_player:
                raise NotYourTurn()
            if room.status != 'in_progress':
                raise GameNotInProgress()
            if not engine.is_valid_index(index):
                raise InvalidMove()
            if room.board[index] != engine.EMPTY:
                raise CellOccupied()

            room.board = engine.apply_move(room.board, index, player.symbol)
            winner = engine.check_winner(room.board)
            if winner is not None:
                room.winner = winner
                winner_player = room.player_by_symbol(winner)
                return MoveResult(room, index, player.symbol, winner,
                                  winner_player.name if winner_player else '')
            if engine.is_draw(room.board):
                room.winner = DRAW
                return MoveResult(room, index, player.symbol, DRAW, 'Nobody')
            room.current_player = engine.other_symbol(room.current_player, self.symbols)
            return MoveResult(room, index, player.symbol, None, None)

    def reset(self, code) -> Optional[Room]:
        with self.lock:
            room = self.get(code)
            if room is not None:
                room.reset()
            return room

    def disconnect(self, sid: str) -> Optional[Tuple[str, Player]]:
        """Drop the room ``sid`` belongs to, whatever its player count."""
        with self.lock:
            found = self.find_by_connection(sid)
            if found is None:
                return None
            code, room = found
            player = room.player_by_id(sid)
            self.remove(code)
            return code, player

