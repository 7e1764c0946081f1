import sqlalchemy as sqla
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

# table with the accounts that own and collaborate on playlists, credentials live elsewhere
class Users(Base):
    __tablename__ = "users"
    id:                 Mapped[str] = mapped_column(sqla.String(50), primary_key=True)
    username:           Mapped[str] = mapped_column(sqla.String(50), nullable=False, unique=True)
    fullname:           Mapped[str] = mapped_column(sqla.Text, nullable=False)

    def __repr__(self):
        return (
            f"<User(id='{self.id}', "
            f"username='{self.username}', "
            f"fullname='{self.fullname}')>"
        )
