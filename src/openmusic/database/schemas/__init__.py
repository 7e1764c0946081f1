from .playlist import PlaylistData, PlaylistView
from .playlist_song import PlaylistSongData, PlaylistSongView
from .song import SongData
from .user import UserData

__all__ = ["PlaylistData", "PlaylistView", "PlaylistSongData", "PlaylistSongView", "SongData", "UserData"]
