from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession, AsyncEngine
from typing import List, Optional
import logging
import argparse

from openmusic.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
    PlaylistsRepository,
    PlaylistSongsRepository,
    SongsRepository,
    UsersRepository,
    CollaborationsRepository,
    PlaylistAuthorizer
)
from openmusic.utils import AppParams

logger = logging.getLogger(__name__)

class CLIOrchestrator():
    def __init__(self, app_params: AppParams):
        self._app_params: AppParams = app_params

        self._db_engine: AsyncEngine
        self._db_session_maker: async_sessionmaker[AsyncSession]

        self._users: UsersRepository
        self._songs: SongsRepository
        self._playlists: PlaylistsRepository
        self._collaborations: CollaborationsRepository
        self._playlist_songs: PlaylistSongsRepository
        self._authorizer: PlaylistAuthorizer

    async def run(self, argv: Optional[List[str]] = None) -> None:
        """parses the command line and runs the matching command, the engine is disposed however the command ends"""
        args = self._parse_cmdline_args(argv)

        # async sqlalchemy initialization, every repository shares this one session factory
        self._db_engine = create_engine(self._app_params.database_url, echo=self._app_params.db_echo)
        self._db_session_maker = create_session_maker(self._db_engine)

        self._users = UsersRepository(self._db_session_maker)
        self._songs = SongsRepository(self._db_session_maker)
        self._playlists = PlaylistsRepository(self._db_session_maker)
        self._collaborations = CollaborationsRepository(self._db_session_maker)
        self._playlist_songs = PlaylistSongsRepository(self._db_session_maker, self._songs)
        self._authorizer = PlaylistAuthorizer(self._playlists, self._collaborations)

        try:
            await self._dispatch(args)
        finally:
            await self._db_engine.dispose()

    async def _dispatch(self, args: argparse.Namespace) -> None:
        match args.command:
            case "init-db":
                if args.drop:
                    await drop_tables(self._db_engine)
                await create_tables(self._db_engine)
                print("Database initialized")

            case "add-user":
                user_id = await self._users.add_user(args.username, args.fullname)
                print(user_id)

            case "add-song":
                song_id = await self._songs.add_song(args.title, args.year, args.performer, genre=args.genre, duration=args.duration)
                print(song_id)

            case "add-playlist":
                playlist_id = await self._playlists.add_playlist(args.name, args.user)
                print(playlist_id)

            case "list-playlists":
                for playlist in await self._playlists.get_playlists(args.user):
                    print(f"{playlist.id}\t{playlist.name}\t{playlist.owner_username}")

            case "delete-playlist":
                await self._authorizer.verify_playlist_owner(args.playlist_id, args.user)
                await self._playlists.delete_playlist_by_id(args.playlist_id)
                print(f"Deleted {args.playlist_id}")

            case "add-collaborator":
                await self._authorizer.verify_playlist_owner(args.playlist_id, args.user)
                collaboration_id = await self._collaborations.add_collaboration(args.playlist_id, args.collaborator)
                print(collaboration_id)

            case "remove-collaborator":
                await self._authorizer.verify_playlist_owner(args.playlist_id, args.user)
                await self._collaborations.delete_collaboration(args.playlist_id, args.collaborator)
                print(f"Removed {args.collaborator} from {args.playlist_id}")

            case "add-song-to-playlist":
                await self._authorizer.verify_song_access(args.playlist_id, args.user)
                association_id = await self._playlist_songs.add_playlist_song(args.playlist_id, args.song_id)
                print(association_id)

            case "list-playlist-songs":
                await self._authorizer.verify_song_access(args.playlist_id, args.user)
                playlist = await self._playlists.get_playlist_by_id(args.playlist_id)
                playlist_songs = await self._playlist_songs.get_playlist_songs(args.playlist_id)
                print(f"{playlist.name} (by {playlist.owner_username})")
                for song in playlist_songs:
                    print(f"{song.id}\t{song.title}\t{song.performer}")

            case "remove-song-from-playlist":
                await self._authorizer.verify_song_access(args.playlist_id, args.user)
                await self._playlist_songs.delete_playlist_song(args.playlist_id, args.song_id)
                print(f"Removed {args.song_id} from {args.playlist_id}")

    def _parse_cmdline_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """creates an argparse parser, adds all the subcommands, and updates _app_params with parsed values. returns the args"""

        parser = argparse.ArgumentParser(prog="openmusic", description="Manage users, songs and shared playlists")
        parser.add_argument("--database-url", type=str, dest="database_url", help="Async SQLAlchemy url of the database, overrides the config file")
        subparsers = parser.add_subparsers(dest="command", required=True)

        init_db = subparsers.add_parser("init-db", help="Create all tables")
        init_db.add_argument("--drop", action="store_true", help="Drop all tables before creating them")

        add_user = subparsers.add_parser("add-user", help="Add a user")
        add_user.add_argument("username", type=str)
        add_user.add_argument("fullname", type=str)

        add_song = subparsers.add_parser("add-song", help="Add a song to the catalogue")
        add_song.add_argument("title", type=str)
        add_song.add_argument("year", type=int)
        add_song.add_argument("performer", type=str)
        add_song.add_argument("--genre", type=str)
        add_song.add_argument("--duration", type=int, help="Length of the song in seconds")

        add_playlist = subparsers.add_parser("add-playlist", help="Create a playlist owned by --user")
        add_playlist.add_argument("name", type=str)

        subparsers.add_parser("list-playlists", help="List the playlists --user owns or collaborates on")

        delete_playlist = subparsers.add_parser("delete-playlist", help="Delete a playlist, only its owner can")
        delete_playlist.add_argument("playlist_id", type=str)

        for command in ("add-collaborator", "remove-collaborator"):
            collaborator = subparsers.add_parser(command, help="Share or unshare a playlist, only its owner can")
            collaborator.add_argument("playlist_id", type=str)
            collaborator.add_argument("collaborator", type=str, help="Id of the user to share the playlist with")

        for command in ("add-song-to-playlist", "remove-song-from-playlist"):
            playlist_song = subparsers.add_parser(command, help="Change the songs on a playlist, owner or collaborator")
            playlist_song.add_argument("playlist_id", type=str)
            playlist_song.add_argument("song_id", type=str)

        list_playlist_songs = subparsers.add_parser("list-playlist-songs", help="List the songs on a playlist")
        list_playlist_songs.add_argument("playlist_id", type=str)

        for subparser in subparsers.choices.values():
            subparser.add_argument("--user", type=str, default=None, help="Id of the user running the command")

        args = parser.parse_args(argv)

        if args.command not in ("init-db", "add-user", "add-song") and args.user is None:
            parser.error(f"{args.command} requires --user")

        self._app_params.database_url = args.database_url if args.database_url else self._app_params.database_url

        return args
