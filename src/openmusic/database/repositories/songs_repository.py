import logging
from typing import Optional
import sqlalchemy as sqla
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from openmusic.exceptions import NotFoundError, PersistenceError
from openmusic.utils import generate_id

from ..models import Songs
from ..schemas import SongData

logger = logging.getLogger(__name__)

class SongsRepository():
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def add_song(self, title: str, year: int, performer: str, genre: Optional[str] = None, duration: Optional[int] = None, album_id: Optional[str] = None) -> str:
        """
        Adds a new row to the Songs table

        Args: 
            title (str): The title of the song
            year (int): The release year of the song
            performer (str): Who performs the song
            genre (Optional[str]): The genre of the song
            duration (Optional[int]): The length of the song in seconds
            album_id (Optional[str]): The album the song belongs to

        Returns:
            str: The id of the new song
        """
        song_id = generate_id("song")
        stmt = sqla.insert(Songs).values(
            id=song_id,
            title=title,
            year=year,
            performer=performer,
            genre=genre,
            duration=duration,
            album_id=album_id
        ).returning(Songs.id)

        try:
            async with self._session_maker() as sql_session:
                async with sql_session.begin():
                    result = await sql_session.execute(stmt)
                    inserted_id = result.scalar_one_or_none()
        except IntegrityError as e:
            logger.warning(f"Song insert rejected for '{title}': {e.orig}")
            raise PersistenceError("Failed to add the song") from e

        if inserted_id is None:
            raise PersistenceError("Failed to add the song")

        logger.info(f"Added song {song_id}: '{title}' by '{performer}'")
        return inserted_id

    async def get_song_by_id(self, song_id: str) -> SongData:
        """
        Gets a song from its id, this doubles as the existence check done before a song is added to a playlist

        Args: 
            song_id (str): The id of the song you want to retrieve

        Returns:
            SongData: The matching song

        Raises:
            NotFoundError: If there is no song with that id
        """
        stmt = sqla.select(Songs).where(Songs.id == song_id)

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            song_row = result.scalars().first()

        if song_row is None:
            logger.debug(f"No song found with id: {song_id}")
            raise NotFoundError("Song not found")

        return SongData(
            id=song_row.id,
            title=song_row.title,
            year=song_row.year,
            performer=song_row.performer,
            genre=song_row.genre,
            duration=song_row.duration,
            album_id=song_row.album_id
        )

    async def delete_song_by_id(self, song_id: str) -> None:
        """removes a song from the catalogue, its playlist associations go with it"""
        stmt = sqla.delete(Songs).where(Songs.id == song_id).returning(Songs.id)

        async with self._session_maker() as sql_session:
            async with sql_session.begin():
                result = await sql_session.execute(stmt)
                deleted_id = result.scalar_one_or_none()

        if deleted_id is None:
            raise NotFoundError("Failed to delete the song. Id not found")

        logger.info(f"Deleted song {song_id}")
