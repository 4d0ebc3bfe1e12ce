"""
Changesets: a proposed mutation of a single record plus its validation result.

A changeset casts the incoming params through a Pydantic schema (fields the
schema does not declare are dropped), layers them over the record's current
values and validates the result. Required fields are checked against that
merged view, while every other rule (lengths, bounds, types) only applies to
fields whose value is changing, so an untouched stale value never blocks an
update. String params are stored stripped of surrounding whitespace; a
whitespace-only string therefore counts as blank. Nothing is written to the
record until ``apply_changes`` is called, which the service layer only does
for valid changesets.

Usage:
    changeset = album_changeset(Album(), {"title": "Kind of Blue"})
    if changeset.valid:
        album = changeset.apply_changes()
    else:
        print(changeset.errors)  # {"title": ["can't be blank"]}
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError, create_model
from sqlalchemy.exc import IntegrityError

from music_db.models import Album, Artist, Base, Genre, Track
from music_db.schemas import (
    AlbumParams,
    ArtistParams,
    GenreParams,
    LongTitleAlbumParams,
    TrackParams
)

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

BLANK = "can't be blank"
TAKEN = "has already been taken"


def _error_message(error: Dict[str, Any]) -> str:
    """Turn one Pydantic error entry into a short changeset message."""
    error_type = error["type"]
    ctx = error.get("ctx") or {}
    value = error.get("input")

    if error_type == "missing" or value is None:
        return BLANK
    if isinstance(value, str) and not value.strip():
        return BLANK
    if error_type == "string_too_short":
        return f"should be at least {ctx['min_length']} character(s)"
    if error_type == "string_too_long":
        return f"should be at most {ctx['max_length']} character(s)"
    if error_type == "greater_than":
        return f"must be greater than {ctx['gt']}"
    if error_type == "greater_than_equal":
        return f"must be greater than or equal to {ctx['ge']}"
    if error_type == "less_than":
        return f"must be less than {ctx['lt']}"
    if error_type == "less_than_equal":
        return f"must be less than or equal to {ctx['le']}"
    return "is invalid"


class Changeset(Generic[T]):
    """
    Validated, not-yet-applied changes for one model instance.

    Attributes:
        data (T): The record the changes are meant for
        schema (Type[BaseModel]): Pydantic model declaring castable fields and rules
        params (Dict[str, Any]): Raw incoming params
        changes (Dict[str, Any]): Cast values that differ from the record
        errors (Dict[str, List[str]]): Validation messages keyed by field
    """

    def __init__(self, data: T, schema: Type[BaseModel], params: Optional[Dict[str, Any]] = None):
        self.data = data
        self.schema = schema
        self.params = dict(params or {})
        self.changes: Dict[str, Any] = {}
        self.errors: Dict[str, List[str]] = {}
        self.unique_fields: List[str] = []
        self._cast()

    def _cast(self) -> None:
        fields = self.schema.model_fields
        current = {name: getattr(self.data, name, None) for name in fields}
        cast = {str(key): value for key, value in self.params.items() if str(key) in fields}

        # Unset columns fall back to the schema defaults
        candidate = {name: value for name, value in current.items() if value is not None}
        candidate.update(cast)

        try:
            validated = self.schema.model_validate(candidate)
        except ValidationError as exc:
            unchanged = set()
            for error in exc.errors():
                field = str(error["loc"][0]) if error["loc"] else "base"
                message = _error_message(error)
                # Presence is checked against the record; every other rule only
                # applies to values being changed
                if message != BLANK and not self._is_changing(field, cast, current):
                    unchanged.add(field)
                    continue
                self.add_error(field, message)

            if self.errors:
                logger.debug(f"{self.source_name} changeset invalid: {self.errors}")
                return
            validated = self._without_rules(unchanged).model_validate(candidate)

        for name, value in validated.model_dump().items():
            if value != current[name]:
                self.changes[name] = value

    @staticmethod
    def _is_changing(field: str, cast: Dict[str, Any], current: Dict[str, Any]) -> bool:
        if field not in cast:
            return False
        value = cast[field]
        if isinstance(value, str):
            value = value.strip()
        return value != current.get(field)

    def _without_rules(self, fields) -> Type[BaseModel]:
        """Derive the schema with ``fields`` accepting any value as-is."""
        overrides = {name: (Any, None) for name in fields}
        return create_model(f"{self.schema.__name__}Unchanged", __base__=self.schema, **overrides)

    @property
    def source_name(self) -> str:
        return type(self.data).__name__.lower()

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, message: str) -> "Changeset[T]":
        messages = self.errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
        return self

    def get_field(self, field: str) -> Any:
        """Return the pending value for a field, or the record's current one."""
        if field in self.changes:
            return self.changes[field]
        return getattr(self.data, field, None)

    def unique_constraint(self, field: str) -> "Changeset[T]":
        """Report a unique violation on ``field`` as a changeset error instead of raising."""
        self.unique_fields.append(field)
        return self

    def handle_integrity_error(self, exc: IntegrityError) -> bool:
        """
        Map a database integrity error onto a declared unique constraint.

        Args:
            exc (IntegrityError): Error raised while flushing this changeset

        Returns:
            bool: True if the error matched a declared constraint and was
            recorded in ``errors``, False otherwise
        """
        message = str(exc.orig if exc.orig is not None else exc).lower()
        table = getattr(self.data, "__tablename__", "")
        for field in self.unique_fields:
            # SQLite reports "genres.name", PostgreSQL "genres_name_key"
            if f"{table}.{field}" in message or f"{table}_{field}" in message:
                self.add_error(field, TAKEN)
                return True
        return False

    def apply_changes(self) -> T:
        for key, value in self.changes.items():
            setattr(self.data, key, value)
        return self.data

    def __repr__(self):
        return f"<Changeset {self.source_name} valid={self.valid} changes={self.changes} errors={self.errors}>"


def artist_changeset(artist: Artist, params: Optional[Dict[str, Any]] = None) -> Changeset[Artist]:
    return Changeset(artist, ArtistParams, params)


def album_changeset(album: Album, params: Optional[Dict[str, Any]] = None) -> Changeset[Album]:
    """Cast the album title and require it to be present."""
    return Changeset(album, AlbumParams, params)


def long_title_album_changeset(album: Album, params: Optional[Dict[str, Any]] = None) -> Changeset[Album]:
    """Like album_changeset, but the title must also be at least 100 characters."""
    return Changeset(album, LongTitleAlbumParams, params)


def track_changeset(track: Track, params: Optional[Dict[str, Any]] = None) -> Changeset[Track]:
    return Changeset(track, TrackParams, params)


def genre_changeset(genre: Genre, params: Optional[Dict[str, Any]] = None) -> Changeset[Genre]:
    return Changeset(genre, GenreParams, params).unique_constraint("name")
