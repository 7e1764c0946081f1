from .playlists_repository import PlaylistsRepository
from .playlist_songs_repository import PlaylistSongsRepository, SongExistenceChecker
from .songs_repository import SongsRepository
from .users_repository import UsersRepository
from .collaborations_repository import CollaborationsRepository

__all__ = ["PlaylistsRepository", "PlaylistSongsRepository", "SongExistenceChecker", "SongsRepository", "UsersRepository", "CollaborationsRepository"]
