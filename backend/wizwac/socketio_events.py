from flask import current_app, request
from flask_socketio import close_room, emit, join_room
from wizwac import rooms
from wizwac.services.games.errors import GameError
from typing import Any, Dict


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _reject(event: str, exc: GameError) -> None:
    """Report a rejected intent to the sender only."""
    current_app.logger.info(f"[rejected] event={event} sid={_get_sid()} reason={exc.message!r}")
    emit('error', {'message': exc.message})


def handle_connect(auth=None):
    emit('connected', {'message': 'Connected'})


def handle_disconnect(reason=None):
    # Any member leaving ends the room for everyone in it
    sid = _get_sid()
    with rooms.lock:
        dropped = rooms.disconnect(sid)
        if not dropped:
            return
        code, player = dropped
        emit('playerDisconnected', {'name': player.name}, to=code, include_self=False)
        close_room(code)
    current_app.logger.info(f"[room-closed] code={code} sid={sid} reason={reason}")


def handle_create_room(player_name):
    sid = _get_sid()
    with rooms.lock:
        try:
            code, symbol = rooms.create(sid, player_name)
        except GameError as exc:
            _reject('createRoom', exc)
            return
        join_room(code)
        emit('roomCreated', {'roomCode': code, 'symbol': symbol, 'playerName': player_name})
    current_app.logger.info(f"[room-created] code={code} sid={sid}")


def handle_join_room(data):
    data = _payload(data)
    sid = _get_sid()
    player_name = data.get('playerName')
    with rooms.lock:
        try:
            symbol = rooms.join(data.get('roomCode'), sid, player_name)
        except GameError as exc:
            _reject('joinRoom', exc)
            return
        room = rooms.get(data.get('roomCode'))
        join_room(room.code)
        emit('roomJoined', {'roomCode': room.code, 'symbol': symbol, 'playerName': player_name})
        emit('gameStart', {
            'playerX': room.players[0].name,
            'playerO': room.players[1].name,
            'currentPlayer': room.current_player,
        }, to=room.code)
    current_app.logger.info(f"[room-joined] code={room.code} sid={sid}")


def handle_make_move(data):
    data = _payload(data)
    with rooms.lock:
        try:
            result = rooms.make_move(data.get('roomCode'), _get_sid(), data.get('index'))
        except GameError as exc:
            _reject('makeMove', exc)
            return
        room = result.room
        current_app.logger.debug(f"[move] code={room.code} index={result.index} symbol={result.symbol}")
        if result.finished:
            emit('gameOver', {
                'winner': result.winner,
                'winnerName': result.winner_name,
                'board': list(room.board),
            }, to=room.code)
            current_app.logger.info(f"[game-over] code={room.code} winner={result.winner}")
            return
        emit('moveMade', {
            'index': result.index,
            'symbol': result.symbol,
            'currentPlayer': room.current_player,
            'board': list(room.board),
        }, to=room.code)


def handle_reset_board(data):
    # Either the bare code or {'roomCode': ...}
    code = data.get('roomCode') if isinstance(data, dict) else data
    with rooms.lock:
        room = rooms.reset(code)
        if room is None:
            return
        emit('boardReset', {'board': list(room.board), 'currentPlayer': room.current_player}, to=room.code)
    current_app.logger.info(f"[board-reset] code={room.code}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    from wizwac import socketio

    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createRoom', handle_create_room, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
    socketio.on_event('makeMove', handle_make_move, namespace=namespace)
    socketio.on_event('resetBoard', handle_reset_board, namespace=namespace)
