"""Exceptions raised by the game services.

Illegal moves (rolling with no rolls left, marking before rolling, marking a
filled row) are not errors: those operations are silent no-ops.
"""


class GameError(Exception):
    """Base class for game service failures."""


class SessionNotFound(GameError):
    """The session id is malformed or not known to the registry."""

    def __init__(self, session_id):
        super().__init__(f"game session {session_id!r} not found")
        self.session_id = session_id


class SessionBusy(GameError):
    """The per-session lock could not be acquired in time."""

    def __init__(self, session_id, timeout):
        super().__init__(f"game session {session_id!r} is busy (waited {timeout}s)")
        self.session_id = session_id
        self.timeout = timeout


class ArchiveError(GameError):
    """The scorecard store could not be written or read."""
