import datetime
import sqlalchemy as sqla
from sqlalchemy.orm import relationship, mapped_column, Mapped

from .base import Base

# association table that creates a many-to-many relationship between playlists and songs, added_at keeps their order
# (playlist_id, song_id) is not unique, the same song can be added more than once
class PlaylistSongs(Base):
    __tablename__ = "playlist_songs"
    id:             Mapped[str] = mapped_column(sqla.String(50), primary_key=True)
    playlist_id:    Mapped[str] = mapped_column(sqla.String(50), sqla.ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id:        Mapped[str] = mapped_column(sqla.String(50), sqla.ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    added_at:       Mapped[datetime.datetime] = mapped_column(sqla.DateTime(timezone=True), nullable=False, default=lambda: datetime.datetime.now(datetime.timezone.utc))
    playlist        = relationship("Playlists", back_populates="playlist_songs")
    song            = relationship("Songs", back_populates="playlist_songs")

    def __repr__(self):
        return (
            f"<PlaylistSong(id='{self.id}', "
            f"playlist_id='{self.playlist_id}', "
            f"song_id='{self.song_id}', "
            f"added_at='{self.added_at}')>"
        )
