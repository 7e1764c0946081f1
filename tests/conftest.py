import pytest
import pytest_asyncio

from openmusic.database import (
    create_engine,
    create_session_maker,
    create_tables,
    PlaylistsRepository,
    PlaylistSongsRepository,
    SongsRepository,
    UsersRepository,
    CollaborationsRepository,
    PlaylistAuthorizer
)


@pytest_asyncio.fixture
async def engine(tmp_path):
    """A fresh sqlite database with every table created."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'openmusic.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
def users(session_maker):
    return UsersRepository(session_maker)


@pytest.fixture
def songs(session_maker):
    return SongsRepository(session_maker)


@pytest.fixture
def playlists(session_maker):
    return PlaylistsRepository(session_maker)


@pytest.fixture
def collaborations(session_maker):
    return CollaborationsRepository(session_maker)


@pytest.fixture
def playlist_songs(session_maker, songs):
    return PlaylistSongsRepository(session_maker, songs)


@pytest.fixture
def authorizer(playlists, collaborations):
    return PlaylistAuthorizer(playlists, collaborations)


@pytest_asyncio.fixture
async def owner_id(users):
    return await users.add_user("dicoding", "Dicoding Indonesia")


@pytest_asyncio.fixture
async def other_user_id(users):
    return await users.add_user("johndoe", "John Doe")


@pytest_asyncio.fixture
async def playlist_id(playlists, owner_id):
    return await playlists.add_playlist("Road Trip", owner_id)


@pytest_asyncio.fixture
async def song_id(songs):
    return await songs.add_song("Life in Technicolor", 2008, "Coldplay", genre="Indie", duration=120)
