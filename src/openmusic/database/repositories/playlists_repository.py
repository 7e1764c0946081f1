import logging
from typing import Optional, List
import sqlalchemy as sqla
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from openmusic.exceptions import NotFoundError, PersistenceError
from openmusic.utils import generate_id

from ..models import Playlists, Users, Collaborations
from ..schemas import PlaylistData, PlaylistView

logger = logging.getLogger(__name__)

class PlaylistsRepository():
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def add_playlist(self, name: str, owner: str) -> str:
        """
        Adds a new row to the Playlists table

        Args: 
            name (str): The name of the playlist you want to add
            owner (str): The id of the user creating the playlist

        Returns:
            str: The id of the new playlist, e.g. `playlist-<16 chars>`

        Raises:
            PersistenceError: If the insert did not return the new row
        """
        playlist_id = generate_id("playlist")
        stmt = sqla.insert(Playlists).values(id=playlist_id, name=name, owner=owner).returning(Playlists.id)

        try:
            async with self._session_maker() as sql_session:
                async with sql_session.begin():
                    result = await sql_session.execute(stmt)
                    inserted_id = result.scalar_one_or_none()
        except IntegrityError as e:
            logger.warning(f"Playlist insert rejected for owner {owner}: {e.orig}")
            raise PersistenceError("Failed to add the playlist") from e

        if inserted_id is None:
            raise PersistenceError("Failed to add the playlist")

        logger.info(f"Added playlist {playlist_id} ('{name}') for user {owner}")
        return inserted_id

    async def get_playlists(self, user_id: str) -> List[PlaylistView]:
        """
        Gets every playlist user_id owns or collaborates on, each playlist appears once

        Args: 
            user_id (str): The user whose playlists you want

        Returns:
            List[PlaylistView]: The playlists with their owner's username, empty if there are none
        """
        stmt = (
            sqla.select(Playlists.id, Playlists.name, Users.username)
            .outerjoin(Users, Users.id == Playlists.owner)
            .outerjoin(Collaborations, Collaborations.playlist_id == Playlists.id)
            .where((Playlists.owner == user_id) | (Collaborations.user_id == user_id))
            .distinct()
            .order_by(Playlists.name, Playlists.id)
        )

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            rows = result.all()

        return [PlaylistView(id=row.id, name=row.name, owner_username=row.username) for row in rows]

    async def get_playlist_by_id(self, playlist_id: str) -> PlaylistView:
        """
        Gets a single playlist with its owner's username

        Args: 
            playlist_id (str): The id of the playlist you want to look up

        Returns:
            PlaylistView: The matching playlist

        Raises:
            NotFoundError: If there is no playlist with that id
        """
        stmt = (
            sqla.select(Playlists.id, Playlists.name, Users.username)
            .outerjoin(Users, Users.id == Playlists.owner)
            .where(Playlists.id == playlist_id)
        )

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            row = result.first()

        if row is None:
            raise NotFoundError("Playlist not found")

        return PlaylistView(id=row.id, name=row.name, owner_username=row.username)

    async def get_playlist(self, playlist_id: str) -> Optional[PlaylistData]:
        """returns the stored playlist row, or None if the playlist doesn't exist"""
        stmt = sqla.select(Playlists).where(Playlists.id == playlist_id)

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            playlist_row = result.scalars().first()

        if playlist_row is None:
            return None

        return PlaylistData(id=playlist_row.id, name=playlist_row.name, owner=playlist_row.owner)

    async def delete_playlist_by_id(self, playlist_id: str) -> None:
        """
        Removes a playlist, its song associations and collaborations are removed by the ON DELETE CASCADE foreign keys

        Args: 
            playlist_id (str): The id of the playlist you want to remove

        Raises:
            NotFoundError: If no playlist was removed
        """
        stmt = sqla.delete(Playlists).where(Playlists.id == playlist_id).returning(Playlists.id)

        async with self._session_maker() as sql_session:
            async with sql_session.begin():
                result = await sql_session.execute(stmt)
                deleted_id = result.scalar_one_or_none()

        if deleted_id is None:
            raise NotFoundError("Failed to delete the playlist. Id not found")

        logger.info(f"Deleted playlist {playlist_id}")
