import sqlalchemy as sqla
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

# table with info about every song in the catalogue
class Songs(Base):
    __tablename__ = "songs"
    id:               Mapped[str] = mapped_column(sqla.String(50), primary_key=True)
    title:            Mapped[str] = mapped_column(sqla.Text, nullable=False)
    year:             Mapped[int] = mapped_column(sqla.Integer, nullable=False)
    performer:        Mapped[str] = mapped_column(sqla.Text, nullable=False)
    genre:            Mapped[str] = mapped_column(sqla.Text, nullable=True)
    duration:         Mapped[int] = mapped_column(sqla.Integer, nullable=True)
    album_id:         Mapped[str] = mapped_column(sqla.String(50), nullable=True)
    playlist_songs    = relationship("PlaylistSongs", back_populates="song", passive_deletes=True)

    def __repr__(self):
        return (
            f"<Song(id='{self.id}', "
            f"title='{self.title}', "
            f"year={self.year}, "
            f"performer='{self.performer}', "
            f"genre='{self.genre}', "
            f"duration={self.duration})>"
        )
