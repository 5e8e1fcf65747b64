"""Client-input errors raised by the room registry.

Each carries the human-readable message sent back to the offending
connection. None of them are fatal to the server.
"""


class GameError(Exception):
    message = 'Invalid request'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RoomNotFound(GameError):
    message = 'Room not found'


class RoomFull(GameError):
    message = 'Room is full'


class NotYourTurn(GameError):
    message = 'Not your turn'


class CellOccupied(GameError):
    message = 'Cell already occupied'


class InvalidMove(GameError):
    message = 'Invalid move'


class GameNotInProgress(GameError):
    message = 'Game is not in progress'


class AlreadyInRoom(GameError):
    message = 'Already in a room'
