import sqlalchemy as sqla
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

# table with info about every playlist, owner is a user id that need not exist in the users table
class Playlists(Base):
    __tablename__ = "playlists"
    id:                 Mapped[str] = mapped_column(sqla.String(50), primary_key=True)
    name:               Mapped[str] = mapped_column(sqla.Text, nullable=False)
    owner:              Mapped[str] = mapped_column(sqla.String(50), nullable=False, index=True)
    playlist_songs      = relationship("PlaylistSongs", back_populates="playlist", passive_deletes=True)
    collaborations      = relationship("Collaborations", back_populates="playlist", passive_deletes=True)

    def __repr__(self):
        return (
            f"<Playlist(id='{self.id}', "
            f"name='{self.name}', "
            f"owner='{self.owner}')>"
        )
