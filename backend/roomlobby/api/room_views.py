"""Room view builders used by REST responses."""

from __future__ import annotations

from roomlobby.rooms.records import GameState
from roomlobby.rooms.records import Player
from roomlobby.rooms.records import RoomView


def player_detail(player: Player) -> dict[str, object]:
    return {
        "userId": player.user_id,
        "username": player.username,
        "isHost": player.is_host,
        "ready": player.ready,
        "team": player.team,
        "bet": player.bet,
    }


def game_state_detail(game_state: GameState | None) -> dict[str, object] | None:
    if game_state is None:
        return None
    return {
        "generation": game_state.generation,
        "stateData": game_state.state_data,
        "winner": game_state.winner,
    }


def room_view_detail(view: RoomView) -> dict[str, object]:
    return {
        "roomId": view.room_id,
        "joinCode": view.join_code,
        "mode": view.mode,
        "status": view.status,
        "hostUserId": view.host_user_id,
        "startedAt": view.started_at,
        "players": [player_detail(player) for player in view.players],
        "gameState": game_state_detail(view.game_state),
        "allReady": view.all_ready,
    }
