import random
import string
from typing import List, Optional

from wizwac.services.games import engine

DRAW = 'draw'


def generate_room_code(length=4):
    """Generate a short room code of uppercase letters."""
    return ''.join(random.choices(string.ascii_uppercase, k=length))


class Player:
    def __init__(self, id: str, name: str, symbol: str):
        self.id = id
        self.name = name
        self.symbol = symbol

    def to_dict(self, include_id=True):
        data = {
            'name': self.name,
            'symbol': self.symbol,
        }
        if include_id:
            data['id'] = self.id
        return data


class Room:
    def __init__(self, code: str, symbols=engine.SYMBOLS):
        self.code = code
        self.symbols = symbols
        self.players: List[Player] = []
        self.board: List[str] = engine.empty_board()
        self.current_player: str = symbols[0]
        self.winner: Optional[str] = None

    @property
    def status(self) -> str:
        if self.winner is not None:
            return 'finished'
        if len(self.players) < 2:
            return 'waiting'
        return 'in_progress'

    def is_full(self) -> bool:
        return len(self.players) >= 2

    def player_by_id(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def player_by_symbol(self, symbol: str) -> Optional[Player]:
        for player in self.players:
            if player.symbol == symbol:
                return player
        return None

    def reset(self) -> None:
        self.board = engine.empty_board()
        self.current_player = self.symbols[0]
        self.winner = None

    def to_dict(self, include_players=True):
        data = {
            'roomCode': self.code,
            'status': self.status,
            'board': list(self.board),
            'currentPlayer': self.current_player,
            'winner': self.winner,
        }
        if include_players:
            # Connection ids stay server-side
            data['players'] = [p.to_dict(include_id=False) for p in self.players]
        return data
