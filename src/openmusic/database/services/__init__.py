from .playlist_authorizer import PlaylistAuthorizer, CollaborationAuthority, OwnershipCheck

__all__ = ["PlaylistAuthorizer", "CollaborationAuthority", "OwnershipCheck"]
