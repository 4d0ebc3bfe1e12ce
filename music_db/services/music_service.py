"""
Service for the music catalog.

This module handles the logic for:
- Looking up artists by name
- Listing the albums of an artist
- Searching albums by title
- Creating, updating and deleting albums through changesets
- Adding tracks and tagging albums with genres
- Running several writes in a single transaction
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from music_db.changesets import (
    Changeset,
    album_changeset,
    artist_changeset,
    genre_changeset,
    long_title_album_changeset,
    track_changeset
)
from music_db.exceptions import (
    AlbumNotFoundError,
    ArtistNotFoundError,
    ChangesetError,
    GenreNotFoundError
)
from music_db.models import Album, Artist, Genre, Track
from music_db.repositories import (
    AlbumRepository,
    ArtistRepository,
    BaseRepository,
    GenreRepository,
    TrackRepository
)

logger = logging.getLogger(__name__)


class MusicService:
    """Service for reading and writing artists, albums, tracks and genres."""

    def __init__(self, db_session: Session):
        """Initialize the service.

        Args:
            db_session: The database session
        """
        self.db_session = db_session
        self.artists = ArtistRepository(db_session)
        self.albums = AlbumRepository(db_session)
        self.tracks = TrackRepository(db_session)
        self.genres = GenreRepository(db_session)
        self._in_transaction = False

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Run the enclosed block as one unit of work.

        Commits when the block finishes and rolls back if it raises; the
        exception is re-raised either way. A transaction opened while
        another is active joins the outer one.

        Yields:
            Session: The service's database session
        """
        if self._in_transaction:
            yield self.db_session
            return

        self._in_transaction = True
        try:
            yield self.db_session
            self.db_session.commit()
        except Exception as e:
            self.db_session.rollback()
            logger.warning(f"Transaction rolled back: {type(e).__name__}: {e}")
            raise
        finally:
            self._in_transaction = False

    def _persist(self, changeset: Changeset, repository: BaseRepository):
        """Apply a valid changeset and flush it, translating declared constraint errors."""
        if not changeset.valid:
            raise ChangesetError(changeset)

        record = changeset.apply_changes()
        try:
            return repository.add(record)
        except IntegrityError as e:
            if changeset.handle_integrity_error(e):
                raise ChangesetError(changeset) from e
            raise

    # Reads

    def get_artist(self, name: str) -> Optional[Artist]:
        """
        Get an artist by name.

        Args:
            name: Exact artist name

        Returns:
            The Artist, or None if there is no artist with that name

        Raises:
            MultipleResultsFound: If several artists share the name
        """
        return self.artists.get_by_name(name)

    def require_artist(self, name: str) -> Artist:
        artist = self.get_artist(name)
        if artist is None:
            raise ArtistNotFoundError(f"Artist {name!r} not found")
        return artist

    def all_albums_by_artist(self, artist: Artist) -> List[Album]:
        """
        Get every album of an artist.

        Args:
            artist: The parent artist

        Returns:
            List of Album objects ordered by title
        """
        return self.albums.get_by_artist(artist)

    def search_albums(self, term: str, skip: int = 0, limit: int = 100) -> List[Album]:
        """
        Find albums whose title contains ``term``, ignoring case.

        Args:
            term: Text to look for in album titles
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of matching Album objects ordered by title
        """
        albums = self.albums.search(term, skip, limit)
        logger.debug(f"Album search {term!r} matched {len(albums)} album(s)")
        return albums

    def list_albums(self, skip: int = 0, limit: int = 100) -> List[Album]:
        return self.albums.get_all(skip, limit)

    def list_genres(self, skip: int = 0, limit: int = 100) -> List[Genre]:
        return self.genres.get_all(skip, limit)

    def get_album(self, album_id: int, preload: Sequence[str] = ()) -> Album:
        """
        Get an album by ID.

        Args:
            album_id: The ID of the album
            preload: Associations to load up front ("artist", "tracks", "genres")

        Returns:
            Album object

        Raises:
            AlbumNotFoundError: If there is no album with that ID
        """
        album = self.albums.get_by_id_with(album_id, preload)
        if album is None:
            raise AlbumNotFoundError(f"Album with ID {album_id} not found")
        return album

    # Writes

    def create_artist(self, params: Dict[str, Any]) -> Artist:
        with self.transaction():
            artist = self._persist(artist_changeset(Artist(), params), self.artists)
        logger.info(f"Created artist {artist.id}: {artist.name}")
        return artist

    def create_album(
        self,
        params: Dict[str, Any],
        artist: Optional[Artist] = None,
        long_title: bool = False
    ) -> Album:
        """
        Create an album, optionally under an artist.

        Args:
            params: Raw album params; only ``title`` is cast
            artist: Artist the album belongs to
            long_title: Validate with the long-title rule as well

        Returns:
            The created Album

        Raises:
            ChangesetError: If the params do not pass validation
        """
        build = long_title_album_changeset if long_title else album_changeset
        with self.transaction():
            album = self._persist(build(Album(artist=artist), params), self.albums)
        logger.info(f"Created album {album.id}: {album.title}")
        return album

    def update_album(self, album: Album, params: Dict[str, Any], long_title: bool = False) -> Album:
        build = long_title_album_changeset if long_title else album_changeset
        changeset = build(album, params)
        with self.transaction():
            album = self._persist(changeset, self.albums)
        logger.info(f"Updated album {album.id}: {sorted(changeset.changes)}")
        return album

    def delete_album(self, album: Album) -> None:
        album_id = album.id
        with self.transaction():
            self.albums.delete(album)
        logger.info(f"Deleted album {album_id}")

    def add_track(self, album: Album, params: Dict[str, Any]) -> Track:
        """
        Append a track to an album.

        When ``index`` is not given the track goes after the album's last one.

        Args:
            album: The album to add to
            params: Raw track params

        Returns:
            The created Track
        """
        params = dict(params)
        if params.get("index") is None:
            params["index"] = self.tracks.next_index(album)

        with self.transaction():
            track = self._persist(track_changeset(Track(album_id=album.id), params), self.tracks)
        logger.info(f"Added track {track.index} to album {album.id}")
        return track

    def create_genre(self, params: Dict[str, Any]) -> Genre:
        """
        Create a genre.

        Raises:
            ChangesetError: If the name is blank or already taken
        """
        with self.transaction():
            genre = self._persist(genre_changeset(Genre(), params), self.genres)
        logger.info(f"Created genre {genre.id}: {genre.name}")
        return genre

    def tag_album(self, album: Album, genre_names: Iterable[str]) -> Album:
        """
        Replace an album's genres with the named ones.

        Args:
            album: The album to tag
            genre_names: Names of existing genres

        Returns:
            The updated Album

        Raises:
            GenreNotFoundError: If any name does not match an existing genre
        """
        names = list(dict.fromkeys(genre_names))
        genres = self.genres.get_by_names(names)
        missing = sorted(set(names) - {genre.name for genre in genres})
        if missing:
            raise GenreNotFoundError(f"Unknown genre(s): {', '.join(missing)}")

        with self.transaction():
            album.genres = genres
            self.albums.add(album)
        logger.info(f"Tagged album {album.id} with {names}")
        return album

    def create_artist_with_albums(
        self,
        artist_params: Dict[str, Any],
        albums_params: Sequence[Dict[str, Any]]
    ) -> Artist:
        """
        Create an artist together with its albums, all or nothing.

        Args:
            artist_params: Raw artist params
            albums_params: Raw params for each album

        Returns:
            The created Artist

        Raises:
            ChangesetError: For the first invalid artist or album; nothing is saved
        """
        with self.transaction():
            artist = self._persist(artist_changeset(Artist(), artist_params), self.artists)
            for params in albums_params:
                self._persist(album_changeset(Album(artist=artist), params), self.albums)
        logger.info(f"Created artist {artist.id} with {len(albums_params)} album(s)")
        return artist
