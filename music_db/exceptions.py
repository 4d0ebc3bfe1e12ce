"""
Custom exceptions for the application.
"""


class MusicDBError(Exception):
    """Base exception for catalog errors."""
    pass


class NotFoundError(MusicDBError):
    """Raised when a requested record does not exist."""
    pass


class ArtistNotFoundError(NotFoundError):
    """Raised when an artist is not found."""
    pass


class AlbumNotFoundError(NotFoundError):
    """Raised when an album is not found."""
    pass


class GenreNotFoundError(NotFoundError):
    """Raised when one or more genres are not found."""
    pass


class ChangesetError(MusicDBError):
    """Raised when a write is attempted with an invalid changeset."""

    def __init__(self, changeset):
        self.changeset = changeset
        fields = ", ".join(sorted(changeset.errors)) or "unknown"
        super().__init__(f"Invalid {changeset.source_name} ({fields})")

    @property
    def errors(self):
        return self.changeset.errors
