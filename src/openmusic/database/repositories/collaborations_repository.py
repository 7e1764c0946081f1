import logging
import sqlalchemy as sqla
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from openmusic.exceptions import ForbiddenError, PersistenceError
from openmusic.utils import generate_id

from ..models import Collaborations

logger = logging.getLogger(__name__)

class CollaborationsRepository():
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def add_collaboration(self, playlist_id: str, user_id: str) -> str:
        """
        Grants user_id access to playlist_id

        Args: 
            playlist_id (str): The playlist being shared
            user_id (str): The user who becomes a collaborator

        Returns:
            str: The id of the new collaboration

        Raises:
            PersistenceError: If the row could not be written, e.g. the pair already exists or an id is unknown
        """
        collaboration_id = generate_id("collab")
        stmt = sqla.insert(Collaborations).values(id=collaboration_id, playlist_id=playlist_id, user_id=user_id).returning(Collaborations.id)

        try:
            async with self._session_maker() as sql_session:
                async with sql_session.begin():
                    result = await sql_session.execute(stmt)
                    inserted_id = result.scalar_one_or_none()
        except IntegrityError as e:
            logger.warning(f"Collaboration insert rejected for playlist {playlist_id} and user {user_id}: {e.orig}")
            raise PersistenceError("Failed to add the collaboration") from e

        if inserted_id is None:
            raise PersistenceError("Failed to add the collaboration")

        logger.info(f"User {user_id} is now a collaborator on playlist {playlist_id}")
        return inserted_id

    async def delete_collaboration(self, playlist_id: str, user_id: str) -> None:
        stmt = sqla.delete(Collaborations).where(
            (Collaborations.playlist_id == playlist_id) & (Collaborations.user_id == user_id)
        ).returning(Collaborations.id)

        async with self._session_maker() as sql_session:
            async with sql_session.begin():
                result = await sql_session.execute(stmt)
                deleted_id = result.scalar_one_or_none()

        if deleted_id is None:
            raise PersistenceError("Failed to delete the collaboration")

        logger.info(f"User {user_id} is no longer a collaborator on playlist {playlist_id}")

    async def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        """
        Checks that user_id collaborates on playlist_id

        Raises:
            ForbiddenError: If there is no matching collaboration
        """
        stmt = sqla.select(Collaborations.id).where(
            (Collaborations.playlist_id == playlist_id) & (Collaborations.user_id == user_id)
        )

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            collaboration_id = result.scalars().first()

        if collaboration_id is None:
            raise ForbiddenError("Collaboration could not be verified")
