"""Typed domain exceptions for lobby and game rule violations.

Every core operation either returns its result or raises exactly one
LobbyError subclass. Checks always precede mutation, so a raised error
leaves the session state untouched. The HTTP views are the only place
these are converted into responses.
"""

from enum import Enum


class LobbyErrorCode(str, Enum):
    """Distinguishable error kinds surfaced to the transport layer."""

    UNKNOWN_PLAYER = "unknown_player"
    UNKNOWN_ROOM = "unknown_room"
    UNKNOWN_GAME = "unknown_game"
    NAME_TAKEN = "name_taken"
    ALREADY_IN_ROOM = "already_in_room"
    ROOM_FULL = "room_full"
    NOT_IN_ROOM = "not_in_room"
    NOT_HOST = "not_host"
    ROOM_NOT_FULL = "room_not_full"
    NOT_IN_GAME = "not_in_game"
    GAME_ENDED = "game_ended"
    INVALID_SETTINGS = "invalid_settings"
    INVALID_ACTION = "invalid_action"


class LobbyError(Exception):
    """Base exception for caller/state mismatches detected by the core.

    None of these are transient: retrying the same call against the same
    state fails the same way.
    """

    code: LobbyErrorCode
    default_message = "lobby error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnknownPlayerError(LobbyError):
    code = LobbyErrorCode.UNKNOWN_PLAYER
    default_message = "Unknown player id"


class UnknownRoomError(LobbyError):
    code = LobbyErrorCode.UNKNOWN_ROOM
    default_message = "Unknown room id"


class UnknownGameError(LobbyError):
    code = LobbyErrorCode.UNKNOWN_GAME
    default_message = "Unknown game id"


class NameTakenError(LobbyError):
    code = LobbyErrorCode.NAME_TAKEN
    default_message = "This name is already taken"


class AlreadyInRoomError(LobbyError):
    code = LobbyErrorCode.ALREADY_IN_ROOM
    default_message = "Player already in the room"


class RoomFullError(LobbyError):
    code = LobbyErrorCode.ROOM_FULL
    default_message = "Room full"


class NotInRoomError(LobbyError):
    code = LobbyErrorCode.NOT_IN_ROOM
    default_message = "Player not in the room"


class NotHostError(LobbyError):
    code = LobbyErrorCode.NOT_HOST
    default_message = "Player is not the host"


class RoomNotFullError(LobbyError):
    code = LobbyErrorCode.ROOM_NOT_FULL
    default_message = "Room must be full to launch the game"


class NotInGameError(LobbyError):
    code = LobbyErrorCode.NOT_IN_GAME
    default_message = "Player not in the game"


class GameEndedError(LobbyError):
    code = LobbyErrorCode.GAME_ENDED
    default_message = "Game is not running anymore"


class InvalidSettingsError(LobbyError):
    """Room settings that would make the end state undefined (e.g. a 1-player room)."""

    code = LobbyErrorCode.INVALID_SETTINGS
    default_message = "Invalid game settings"


class InvalidActionError(LobbyError):
    """Action is not part of the game kind's action set."""

    code = LobbyErrorCode.INVALID_ACTION
    default_message = "Action not allowed for this game"
