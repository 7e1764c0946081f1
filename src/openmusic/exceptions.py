"""
Exceptions raised by the openmusic data layer.

Every error carries a `status_code` so an outer layer (http, cli) can map the kind
of failure without matching on messages.
"""


class OpenMusicError(Exception):
    """Base exception for everything raised by openmusic."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(OpenMusicError):
    """Raised when the caller asked for something that cannot be done."""
    status_code = 400


class InvariantError(ClientError):
    """Raised when input would break a data invariant, e.g. a username that is already taken."""
    pass


class NotFoundError(ClientError):
    """Raised when a playlist, song, user or association does not exist."""
    status_code = 404


class ForbiddenError(ClientError):
    """Raised when a user is neither allowed to own nor collaborate on a playlist."""
    status_code = 403


class PersistenceError(OpenMusicError):
    """Raised when a write that should have affected a row did not."""
    pass
