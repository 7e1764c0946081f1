import uuid

ID_LENGTH = 16

def generate_id(prefix: str) -> str:
    """returns a new opaque id like `playlist-1f0c9a2b7d4e4c21`, the prefix names the entity type"""
    return f"{prefix}-{uuid.uuid4().hex[:ID_LENGTH]}"
