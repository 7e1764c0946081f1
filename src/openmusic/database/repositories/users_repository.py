import logging
import sqlalchemy as sqla
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from openmusic.exceptions import InvariantError, NotFoundError, PersistenceError
from openmusic.utils import generate_id

from ..models import Users
from ..schemas import UserData

logger = logging.getLogger(__name__)

class UsersRepository():
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def add_user(self, username: str, fullname: str) -> str:
        """
        Adds a new row to the Users table once the username is known to be free

        Args: 
            username (str): The unique username
            fullname (str): The display name of the user

        Returns:
            str: The id of the new user

        Raises:
            InvariantError: If the username is already taken
        """
        await self.verify_new_username(username)

        user_id = generate_id("user")
        stmt = sqla.insert(Users).values(id=user_id, username=username, fullname=fullname).returning(Users.id)

        # the unique index still catches a username taken between the check and the insert
        try:
            async with self._session_maker() as sql_session:
                async with sql_session.begin():
                    result = await sql_session.execute(stmt)
                    inserted_id = result.scalar_one_or_none()
        except IntegrityError as e:
            logger.warning(f"User insert rejected for username '{username}': {e.orig}")
            raise InvariantError("Failed to add the user. Username is already taken") from e

        if inserted_id is None:
            raise PersistenceError("Failed to add the user")

        logger.info(f"Added user {user_id} with username '{username}'")
        return inserted_id

    async def get_user_by_id(self, user_id: str) -> UserData:
        stmt = sqla.select(Users).where(Users.id == user_id)

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            user_row = result.scalars().first()

        if user_row is None:
            raise NotFoundError("User not found")

        return UserData(id=user_row.id, username=user_row.username, fullname=user_row.fullname)

    async def verify_new_username(self, username: str) -> None:
        stmt = sqla.select(Users.id).where(Users.username == username)

        async with self._session_maker() as sql_session:
            result = await sql_session.execute(stmt)
            existing_id = result.scalars().first()

        if existing_id is not None:
            logger.debug(f"Username '{username}' is already used by {existing_id}")
            raise InvariantError("Failed to add the user. Username is already taken")
