from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class SongData:
    """
    this dataclass contains the catalogue information about a song

    Attributes:
        id (str): the opaque song id
        title (str): the title of the song
        year (int): the release year
        performer (str): who performs the song
        genre (str): the genre of the song
        duration (int): the length of the song in seconds
        album_id (str): the id of the album the song is on
    """
    id: str
    title: str
    year: int
    performer: str
    genre: Optional[str] = None
    duration: Optional[int] = None
    album_id: Optional[str] = None
