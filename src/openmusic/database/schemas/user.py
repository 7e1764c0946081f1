from dataclasses import dataclass

@dataclass(frozen=True)
class UserData:
    id: str
    username: str
    fullname: str
