# sqlalchemy ORM models
from .models import (
    Users,
    Songs,
    Playlists,
    PlaylistSongs,
    Collaborations,
    Base
)

# dataclasses
from .schemas import (
    PlaylistData,
    PlaylistView,
    PlaylistSongData,
    PlaylistSongView,
    SongData,
    UserData
)

# engine and session factory shared by every repository
from .engine import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables
)

# Repository Helpers (direct database operations)
from .repositories import (
    PlaylistsRepository,
    PlaylistSongsRepository,
    SongExistenceChecker,
    SongsRepository,
    UsersRepository,
    CollaborationsRepository
)

# authorization rules built on top of the repositories
from .services import (
    PlaylistAuthorizer,
    CollaborationAuthority,
    OwnershipCheck
)

__all__ = [
    # model imports
    "Users",
    "Songs",
    "Playlists",
    "PlaylistSongs",
    "Collaborations",
    "Base",

    # schema imports
    "PlaylistData",
    "PlaylistView",
    "PlaylistSongData",
    "PlaylistSongView",
    "SongData",
    "UserData",

    # engine imports
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",

    # repository imports
    "PlaylistsRepository",
    "PlaylistSongsRepository",
    "SongExistenceChecker",
    "SongsRepository",
    "UsersRepository",
    "CollaborationsRepository",

    # service imports
    "PlaylistAuthorizer",
    "CollaborationAuthority",
    "OwnershipCheck",
]
