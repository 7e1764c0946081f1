import sqlalchemy as sqla
from sqlalchemy.orm import relationship, mapped_column, Mapped

from .base import Base

# association table granting a user access to a playlist they don't own
class Collaborations(Base):
    __tablename__ = "collaborations"
    __table_args__ = (sqla.UniqueConstraint("playlist_id", "user_id", name="unique_playlist_id_and_user_id"),)
    id:             Mapped[str] = mapped_column(sqla.String(50), primary_key=True)
    playlist_id:    Mapped[str] = mapped_column(sqla.String(50), sqla.ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False)
    user_id:        Mapped[str] = mapped_column(sqla.String(50), sqla.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    playlist        = relationship("Playlists", back_populates="collaborations")

    def __repr__(self):
        return (
            f"<Collaboration(id='{self.id}', "
            f"playlist_id='{self.playlist_id}', "
            f"user_id='{self.user_id}')>"
        )
