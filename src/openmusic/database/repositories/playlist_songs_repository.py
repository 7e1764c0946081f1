import logging
from typing import List, Protocol
import sqlalchemy as sqla
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from openmusic.exceptions import NotFoundError, PersistenceError
from openmusic.utils import generate_id

from ..models import PlaylistSongs, Songs
from ..schemas import PlaylistSongData, PlaylistSongView

logger = logging.getLogger(__name__)

class SongExistenceChecker(Protocol):
    """anything that can confirm a song exists, SongsRepository is the real one"""

    async def get_song_by_id(self, song_id: str):
        """Return the song, or raise NotFoundError if there is none."""

class PlaylistSongsRepository():
    def __init__(self, session_maker: async_sessionmaker[AsyncSession], songs: SongExistenceChecker):
        self._session_maker = session_maker
        self._songs = songs

    async def add_playlist_song(self, playlist_id: str, song_id: str) -> str:
        """
        Adds a song to a playlist. The song has to exist before anything is written

        Args: 
            playlist_id (str): The playlist you want to add the song to
            song_id (str): The song you want to add

        Returns:
            str: The id of the new association, e.g. `playlist_song-<16 chars>`

        Raises:
            NotFoundError: If the song doesn't exist, nothing is written in that case
            PersistenceError: If the row could not be written, including when the song or playlist vanished after the check
        """
        await self._songs.get_song_by_id(song_id)

        association_id = generate_id("playlist_song")
        stmt = sqla.insert(PlaylistSongs).values(id=association_id, playlist_id=playlist_id, song_id=song_id).returning(PlaylistSongs.id)

        try:
            async with self._session_maker() as sql_session:
                async with sql_session.begin():
                    result = await sql_session.execute(stmt)
                    inserted_id = result.scalar_one_or_none()
        except IntegrityError as e:
            logger.warning(f"Association insert rejected for playlist {playlist_id} and song {song_id}: {e.orig}")
            raise PersistenceError("Failed to add the song to the playlist") from e

        if inserted_id is None:
            raise PersistenceError("Failed to add the song to the playlist")

        logger.info(f"Added song {song_id} to playlist {playlist_id}")
        return inserted_id

    async def get_playlist_songs(self, playlist_id: str) -> List[PlaylistSongView]:
        """
        Gets the songs on a playlist

        Args: 
            playlist_id (str): The playlist you want the songs from

        Returns:
            List[PlaylistSongView]: The songs on the playlist

        Raises:
            NotFoundError: If the playlist has no songs, this includes playlists that exist but are empty
        """
        stmt = (
            sqla.select(Songs.id, Songs.title, Songs.performer)
            .join(PlaylistSongs, PlaylistSongs.song_id == Songs.id)
            .where(PlaylistSongs.playlist_id == playlist_id)
            .order_by(PlaylistSongs.added_at, PlaylistSongs.id)
        )

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            rows = result.all()

        if not rows:
            logger.debug(f"No songs found for playlist with id: {playlist_id}")
            raise NotFoundError("Playlist songs not found")

        return [PlaylistSongView(id=row.id, title=row.title, performer=row.performer) for row in rows]

    async def get_playlist_song_rows(self, playlist_id: str) -> List[PlaylistSongData]:
        """
        Gets the raw association rows of a playlist, unlike get_playlist_songs an empty playlist gives an empty list

        Args: 
            playlist_id (str): The ID of the playlist you want the associations of

        Returns:
            List[PlaylistSongData]: The association rows
        """
        stmt = sqla.select(PlaylistSongs).where(PlaylistSongs.playlist_id == playlist_id).order_by(PlaylistSongs.added_at, PlaylistSongs.id)

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            association_rows = result.scalars().all()

        return [PlaylistSongData(id=row.id, playlist_id=row.playlist_id, song_id=row.song_id) for row in association_rows]

    async def delete_playlist_song(self, playlist_id: str, song_id: str) -> None:
        """
        Removes a song from a playlist. Every association for the pair is removed

        Raises:
            NotFoundError: If the song was not on the playlist
        """
        stmt = sqla.delete(PlaylistSongs).where(
            (PlaylistSongs.playlist_id == playlist_id) & (PlaylistSongs.song_id == song_id)
        ).returning(PlaylistSongs.id)

        async with self._session_maker() as sql_session:
            async with sql_session.begin():
                result = await sql_session.execute(stmt)
                deleted_ids = result.scalars().all()

        if not deleted_ids:
            raise NotFoundError("Failed to remove the song from the playlist")

        logger.info(f"Removed song {song_id} from playlist {playlist_id} ({len(deleted_ids)} row(s))")
