from .users import Users
from .songs import Songs
from .playlists import Playlists
from .playlist_songs import PlaylistSongs
from .collaborations import Collaborations
from .base import Base

__all__ = ["Users", "Songs", "Playlists", "PlaylistSongs", "Collaborations", "Base"]
