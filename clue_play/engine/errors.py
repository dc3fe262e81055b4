"""
clue_play/engine/errors.py

Rejections raised by the session engine.

Every error is connection-local and recoverable: the consumer catches
``GameError``, sends ``{type: "error", code, message}`` to the offending
connection only, and keeps the socket open.  The ``code`` is the class
name so that clients can branch on it without parsing the message.
"""


class GameError(Exception):
    """Base class for every rejected intent."""

    default_message = 'That action is not allowed right now.'

    def __init__(self, message: str = ''):
        super().__init__(message or self.default_message)

    @property
    def code(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self)


class InvalidName(GameError):
    default_message = 'Please enter a name before joining.'


class AlreadyJoined(GameError):
    default_message = 'This connection has already joined the game.'


class AuthorityConflict(GameError):
    default_message = 'A game master already exists.'


class NotAuthorized(GameError):
    default_message = 'Only the game master can do that.'


class NotInProgress(GameError):
    default_message = 'No game is currently in progress.'


class AlreadyGuessed(GameError):
    default_message = 'You have already made a guess this round.'


class UnknownPlayer(GameError):
    default_message = 'Only seated players can make a guess.'


class InvalidGuess(GameError):
    default_message = 'A guess needs a suspect, a weapon and a room.'


class InvalidMessage(GameError):
    default_message = 'Unrecognised message.'
