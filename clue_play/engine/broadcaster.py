"""
clue_play/engine/broadcaster.py

Outbound message contracts.

The session never talks to sockets.  Each operation returns an ordered
list of ``Notice`` objects; a notice names its recipient (a connection id)
or ``EVERYONE``, and the consumer delivers them in list order.

── Messages to client ────────────────────────────────────────────────────
  {type: "connected",           connectionId}
  {type: "candidates",          suspects, weapons, rooms}
  {type: "sessionState",        phase, players, currentPlayer, hasGameMaster}
  {type: "updatePlayers",       players}
  {type: "updateSolution",      solution}                  (master only)
  {type: "setGameMaster",       isGameMaster}              (joining connection)
  {type: "guessResult",         score, correct, timestamp} (guesser only)
  {type: "gameOver",            solution, scoreboard}
  {type: "newGameStarted"}
  {type: "updateCurrentPlayer", currentPlayer}
  {type: "error",               code, message}             (offender only)
"""

from typing import List, NamedTuple, Optional

EVERYONE = None


class Notice(NamedTuple):
    to:      Optional[str]   # connection id, or EVERYONE
    payload: dict

    @property
    def is_broadcast(self) -> bool:
        return self.to is EVERYONE


Outbox = List[Notice]


def connected(conn_id: str) -> Notice:
    return Notice(conn_id, {'type': 'connected', 'connectionId': conn_id})


def candidates(conn_id: str, cards: dict) -> Notice:
    return Notice(conn_id, {'type': 'candidates', **cards})


def session_state(conn_id: str, phase: str, players: dict,
                  current_player: Optional[str], has_game_master: bool) -> Notice:
    return Notice(conn_id, {
        'type':          'sessionState',
        'phase':         phase,
        'players':       players,
        'currentPlayer': current_player,
        'hasGameMaster': has_game_master,
    })


def update_players(players: dict) -> Notice:
    return Notice(EVERYONE, {'type': 'updatePlayers', 'players': players})


def update_solution(master_id: str, solution: dict) -> Notice:
    return Notice(master_id, {'type': 'updateSolution', 'solution': solution})


def set_game_master(conn_id: str, is_game_master: bool) -> Notice:
    return Notice(conn_id, {'type': 'setGameMaster', 'isGameMaster': is_game_master})


def guess_result(conn_id: str, score: int, correct: dict, timestamp: str) -> Notice:
    return Notice(conn_id, {
        'type':      'guessResult',
        'score':     score,
        'correct':   dict(correct),
        'timestamp': timestamp,
    })


def game_over(solution: dict, scoreboard: dict) -> Notice:
    return Notice(EVERYONE, {
        'type':       'gameOver',
        'solution':   solution,
        'scoreboard': scoreboard,
    })


def new_game_started() -> Notice:
    return Notice(EVERYONE, {'type': 'newGameStarted'})


def update_current_player(current_player: Optional[str]) -> Notice:
    return Notice(EVERYONE, {'type': 'updateCurrentPlayer', 'currentPlayer': current_player})


def error(conn_id: str, exc) -> Notice:
    return Notice(conn_id, {'type': 'error', 'code': exc.code, 'message': exc.message})
