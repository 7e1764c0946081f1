"""
Tests for the owner and owner-or-collaborator policies.
"""
import pytest

from openmusic.exceptions import ForbiddenError, NotFoundError
from openmusic.database import PlaylistAuthorizer


class RecordingCollaborationAuthority:
    """Collaboration check double that records calls and fails with a given error."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    async def verify_collaborator(self, playlist_id, user_id):
        self.calls.append((playlist_id, user_id))
        if self.error is not None:
            raise self.error


class TestVerifyPlaylistOwner:
    """Test the owner-only policy."""

    async def test_owner_passes(self, authorizer, playlist_id, owner_id):
        assert await authorizer.verify_playlist_owner(playlist_id, owner_id) is None

    async def test_other_user_is_forbidden(self, authorizer, playlist_id, other_user_id):
        with pytest.raises(ForbiddenError):
            await authorizer.verify_playlist_owner(playlist_id, other_user_id)

    async def test_collaborator_is_still_not_owner(self, authorizer, collaborations, playlist_id, other_user_id):
        await collaborations.add_collaboration(playlist_id, other_user_id)

        with pytest.raises(ForbiddenError):
            await authorizer.verify_playlist_owner(playlist_id, other_user_id)

    async def test_missing_playlist_is_not_found(self, authorizer, owner_id):
        with pytest.raises(NotFoundError):
            await authorizer.verify_playlist_owner("playlist-doesnotexist00", owner_id)

    async def test_check_playlist_owner_does_not_raise(self, authorizer, playlist_id, owner_id, other_user_id):
        assert (await authorizer.check_playlist_owner(playlist_id, owner_id)).is_owner

        check = await authorizer.check_playlist_owner(playlist_id, other_user_id)
        assert not check.is_owner
        assert isinstance(check.error, ForbiddenError)

        check = await authorizer.check_playlist_owner("playlist-doesnotexist00", owner_id)
        assert isinstance(check.error, NotFoundError)


class TestVerifyPlaylistAccess:
    """Test the owner-or-collaborator policy."""

    async def test_owner_passes_without_collaboration_check(self, playlists, playlist_id, owner_id):
        authority = RecordingCollaborationAuthority()
        authorizer = PlaylistAuthorizer(playlists, authority)

        await authorizer.verify_playlist_access(playlist_id, owner_id)

        assert authority.calls == []

    async def test_collaborator_passes(self, authorizer, collaborations, playlist_id, other_user_id):
        await collaborations.add_collaboration(playlist_id, other_user_id)

        assert await authorizer.verify_playlist_access(playlist_id, other_user_id) is None

    async def test_stranger_gets_the_ownership_rejection(self, authorizer, playlist_id, other_user_id):
        with pytest.raises(ForbiddenError) as owner_only:
            await authorizer.verify_playlist_owner(playlist_id, other_user_id)

        with pytest.raises(ForbiddenError) as owner_or_collaborator:
            await authorizer.verify_playlist_access(playlist_id, other_user_id)

        assert owner_or_collaborator.value.message == owner_only.value.message
        assert owner_or_collaborator.value.message != "Collaboration could not be verified"

    async def test_missing_playlist_is_not_found_without_fallback(self, playlists, owner_id):
        authority = RecordingCollaborationAuthority()
        authorizer = PlaylistAuthorizer(playlists, authority)

        with pytest.raises(NotFoundError):
            await authorizer.verify_playlist_access("playlist-doesnotexist00", owner_id)

        assert authority.calls == []

    @pytest.mark.parametrize("collaboration_error", [
        ForbiddenError("not a collaborator"),
        NotFoundError("collaboration not found"),
        ConnectionError("database went away"),
    ])
    async def test_collaboration_failure_is_never_surfaced(self, playlists, playlist_id, other_user_id, collaboration_error):
        authority = RecordingCollaborationAuthority(error=collaboration_error)
        authorizer = PlaylistAuthorizer(playlists, authority)

        with pytest.raises(ForbiddenError) as exc_info:
            await authorizer.verify_playlist_access(playlist_id, other_user_id)

        assert exc_info.value is not collaboration_error
        assert exc_info.value.message == "You are not entitled to access this resource"
        assert authority.calls == [(playlist_id, other_user_id)]

    async def test_verify_song_access_follows_the_same_policy(self, authorizer, collaborations, playlist_id, owner_id, other_user_id, users):
        stranger_id = await users.add_user("stranger", "Stranger")
        await collaborations.add_collaboration(playlist_id, other_user_id)

        await authorizer.verify_song_access(playlist_id, owner_id)
        await authorizer.verify_song_access(playlist_id, other_user_id)

        with pytest.raises(ForbiddenError):
            await authorizer.verify_song_access(playlist_id, stranger_id)

        with pytest.raises(NotFoundError):
            await authorizer.verify_song_access("playlist-doesnotexist00", owner_id)

    async def test_removed_collaborator_loses_access(self, authorizer, collaborations, playlist_id, other_user_id):
        await collaborations.add_collaboration(playlist_id, other_user_id)
        await collaborations.delete_collaboration(playlist_id, other_user_id)

        with pytest.raises(ForbiddenError):
            await authorizer.verify_playlist_access(playlist_id, other_user_id)
