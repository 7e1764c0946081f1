from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class PlaylistData:
    """
    a playlist row as it is stored

    Attributes:
        id (str): the opaque playlist id, e.g. `playlist-<16 chars>`
        name (str): the name of the playlist
        owner (str): the id of the user who created the playlist
    """
    id: str
    name: str
    owner: str

@dataclass(frozen=True)
class PlaylistView:
    """
    a playlist joined with the username of its owner, this is never persisted

    Attributes:
        id (str): the opaque playlist id
        name (str): the name of the playlist
        owner_username (Optional[str]): the username of the owner, or None if the owner could not be resolved
    """
    id: str
    name: str
    owner_username: Optional[str]
