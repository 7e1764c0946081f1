import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from openmusic.exceptions import ClientError, ForbiddenError, NotFoundError

from ..repositories import PlaylistsRepository

logger = logging.getLogger(__name__)

class CollaborationAuthority(Protocol):
    """anything that can confirm a user collaborates on a playlist, CollaborationsRepository is the real one"""

    async def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        """Return None if user_id collaborates on playlist_id, raise otherwise."""

@dataclass(frozen=True)
class OwnershipCheck:
    """
    the outcome of checking who owns a playlist

    Attributes:
        error (Optional[ClientError]): None when the user owns the playlist, otherwise the NotFoundError or ForbiddenError to report
    """
    error: Optional[ClientError] = None

    @property
    def is_owner(self) -> bool:
        return self.error is None

class PlaylistAuthorizer():
    def __init__(self, playlists: PlaylistsRepository, collaborations: CollaborationAuthority):
        self._playlists = playlists
        self._collaborations = collaborations

    async def check_playlist_owner(self, playlist_id: str, user_id: str) -> OwnershipCheck:
        """
        Evaluates ownership without raising

        Args:
            playlist_id (str): The playlist being accessed
            user_id (str): The user trying to access it

        Returns:
            OwnershipCheck: empty when user_id is the owner, otherwise it holds a NotFoundError (no such playlist) or a ForbiddenError (someone else owns it)
        """
        playlist = await self._playlists.get_playlist(playlist_id)

        if playlist is None:
            return OwnershipCheck(error=NotFoundError("Playlist not found"))

        if playlist.owner != user_id:
            return OwnershipCheck(error=ForbiddenError("You are not entitled to access this resource"))

        return OwnershipCheck()

    async def verify_playlist_owner(self, playlist_id: str, user_id: str) -> None:
        """
        Owner-only policy

        Raises:
            NotFoundError: If the playlist doesn't exist
            ForbiddenError: If user_id is not the owner
        """
        check = await self.check_playlist_owner(playlist_id, user_id)

        if not check.is_owner:
            raise check.error

    async def verify_playlist_access(self, playlist_id: str, user_id: str) -> None:
        """
        Owner-or-collaborator policy. A missing playlist is reported straight away. When the user isn't the owner
        the collaboration is checked, and if that fails too the ownership ForbiddenError is what gets raised, the
        collaboration failure itself is never reported

        Raises:
            NotFoundError: If the playlist doesn't exist
            ForbiddenError: The ownership rejection, when user_id is neither owner nor collaborator
        """
        check = await self.check_playlist_owner(playlist_id, user_id)

        if check.is_owner:
            return

        if isinstance(check.error, NotFoundError):
            raise check.error

        if await self._is_collaborator(playlist_id, user_id):
            return

        raise check.error

    async def verify_song_access(self, playlist_id: str, user_id: str) -> None:
        """the check run before any song level change on a playlist, same policy as verify_playlist_access"""
        await self.verify_playlist_access(playlist_id, user_id)

    async def _is_collaborator(self, playlist_id: str, user_id: str) -> bool:
        # any failure of the collaboration check counts as "not a collaborator"
        try:
            await self._collaborations.verify_collaborator(playlist_id, user_id)
        except Exception as e:
            logger.debug(f"Collaboration check failed for user {user_id} on playlist {playlist_id}: {e!r}")
            return False

        return True
