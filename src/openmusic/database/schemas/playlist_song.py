from dataclasses import dataclass

@dataclass(frozen=True)
class PlaylistSongData:
    """a single join row linking one playlist to one song"""
    id: str
    playlist_id: str
    song_id: str

@dataclass(frozen=True)
class PlaylistSongView:
    """a song as it is listed inside a playlist, `id` is the song id"""
    id: str
    title: str
    performer: str
