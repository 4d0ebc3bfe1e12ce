"""
Integration tests for the music service.

These tests verify that:
1. Artist lookup, album listing and album search return the right rows
2. Preloading fills associations up front
3. Invalid changesets never reach the database
4. Unique genre names are reported as changeset errors
5. Transactions commit or roll back as a unit
"""

import pytest
from sqlalchemy import func, inspect, select, text
from sqlalchemy.exc import MultipleResultsFound

from music_db.exceptions import (
    AlbumNotFoundError,
    ArtistNotFoundError,
    ChangesetError,
    GenreNotFoundError
)
from music_db.models import Album, Artist, Genre, Track


def _count(db_session, model) -> int:
    return db_session.scalar(select(func.count()).select_from(model))


def test_get_artist_by_name(music_service, catalog):
    artist = music_service.get_artist("Miles Davis")

    assert artist is not None
    assert artist.id == catalog["miles"].id


def test_get_artist_returns_none_when_missing(music_service, catalog):
    assert music_service.get_artist("Thelonious Monk") is None


def test_get_artist_is_exact_match(music_service, catalog):
    assert music_service.get_artist("miles davis") is None


def test_require_artist_raises_when_missing(music_service, catalog):
    with pytest.raises(ArtistNotFoundError):
        music_service.require_artist("Thelonious Monk")


def test_get_artist_with_shared_name_raises(music_service, catalog):
    music_service.create_artist({"name": "Miles Davis"})

    with pytest.raises(MultipleResultsFound):
        music_service.get_artist("Miles Davis")


def test_all_albums_by_artist(music_service, catalog):
    albums = music_service.all_albums_by_artist(catalog["miles"])

    assert [album.title for album in albums] == ["Cookin' At The Plugged Nickel", "Kind Of Blue"]


def test_all_albums_by_artist_without_albums(music_service, catalog):
    artist = music_service.create_artist({"name": "Thelonious Monk"})

    assert music_service.all_albums_by_artist(artist) == []


def test_all_albums_by_unsaved_artist_ignores_albums_without_artist(music_service, catalog):
    music_service.create_album({"title": "Orphan"})

    assert music_service.all_albums_by_artist(Artist(name="Nobody")) == []


def test_search_albums_is_case_insensitive(music_service, catalog):
    albums = music_service.search_albums("BLUE")

    assert [album.title for album in albums] == ["Kind Of Blue"]


def test_search_albums_matches_substrings(music_service, catalog):
    albums = music_service.search_albums("in")

    assert [album.title for album in albums] == [
        "Cookin' At The Plugged Nickel",
        "Kind Of Blue",
        "Portrait In Jazz",
        "You Must Believe In Spring",
    ]


def test_search_albums_without_match(music_service, catalog):
    assert music_service.search_albums("bebop") == []


def test_search_albums_paginates(music_service, catalog):
    albums = music_service.search_albums("in", skip=1, limit=2)

    assert [album.title for album in albums] == ["Kind Of Blue", "Portrait In Jazz"]


def test_search_is_only_supported_for_albums(music_service, catalog):
    with pytest.raises(NotImplementedError):
        music_service.genres.search("jazz")


def test_search_term_wildcards_are_not_escaped(music_service, catalog):
    assert len(music_service.search_albums("%")) == 4
    assert [a.title for a in music_service.search_albums("Kind_Of")] == ["Kind Of Blue"]


def test_get_album_preloads_associations(music_service, db_session, catalog):
    album_id = catalog["kind_of_blue"].id
    db_session.expunge_all()

    album = music_service.get_album(album_id, preload=("artist", "tracks", "genres"))

    unloaded = inspect(album).unloaded
    assert "tracks" not in unloaded
    assert "genres" not in unloaded
    assert "artist" not in unloaded
    assert [track.index for track in album.tracks] == [1, 2, 3, 4, 5]
    assert [genre.name for genre in album.genres] == ["jazz"]
    assert album.artist.name == "Miles Davis"


def test_get_album_without_preload_leaves_associations_unloaded(music_service, db_session, catalog):
    album_id = catalog["kind_of_blue"].id
    db_session.expunge_all()

    album = music_service.get_album(album_id)

    assert "tracks" in inspect(album).unloaded


def test_get_album_rejects_unknown_association(music_service, catalog):
    with pytest.raises(ValueError):
        music_service.get_album(catalog["kind_of_blue"].id, preload=("label",))


def test_get_album_missing(music_service, catalog):
    with pytest.raises(AlbumNotFoundError):
        music_service.get_album(9999)


def test_create_album(music_service, db_session, catalog):
    album = music_service.create_album({"title": "Sketches Of Spain"}, artist=catalog["miles"])

    assert album.id is not None
    assert album.artist_id == catalog["miles"].id
    assert album.created_at is not None
    assert "Sketches Of Spain" in [a.title for a in music_service.all_albums_by_artist(catalog["miles"])]


def test_create_album_with_blank_title_writes_nothing(music_service, db_session, catalog):
    before = _count(db_session, Album)

    with pytest.raises(ChangesetError) as exc_info:
        music_service.create_album({"title": "  "})

    assert exc_info.value.errors == {"title": ["can't be blank"]}
    assert _count(db_session, Album) == before


def test_create_album_with_long_title_rule(music_service, db_session, catalog):
    with pytest.raises(ChangesetError) as exc_info:
        music_service.create_album({"title": "Kind Of Blue"}, long_title=True)

    assert exc_info.value.errors == {"title": ["should be at least 100 character(s)"]}

    album = music_service.create_album({"title": "x" * 120}, long_title=True)
    assert len(album.title) == 120


def test_create_album_stores_trimmed_title(music_service, db_session, catalog):
    album = music_service.create_album({"title": "  Blue Train  "})

    db_session.expire_all()
    assert music_service.get_album(album.id).title == "Blue Train"


def test_update_album(music_service, catalog):
    album = music_service.update_album(catalog["portrait"], {"title": "Portrait In Jazz (Remastered)"})

    assert album.title == "Portrait In Jazz (Remastered)"
    assert [a.title for a in music_service.search_albums("remastered")] == ["Portrait In Jazz (Remastered)"]


def test_update_album_invalid_keeps_title(music_service, db_session, catalog):
    album = catalog["portrait"]

    with pytest.raises(ChangesetError):
        music_service.update_album(album, {"title": ""})

    db_session.expire_all()
    assert music_service.get_album(album.id).title == "Portrait In Jazz"


def test_update_album_with_long_title_rule_keeps_untouched_title(music_service, catalog):
    album = music_service.update_album(catalog["portrait"], {}, long_title=True)

    assert album.title == "Portrait In Jazz"

    with pytest.raises(ChangesetError):
        music_service.update_album(catalog["portrait"], {"title": "Portrait"}, long_title=True)


def test_track_play_count_defaults_in_database(music_service, db_session, catalog):
    db_session.execute(
        text('INSERT INTO tracks (title, "index", album_id) VALUES (:title, 1, :album_id)'),
        {"title": "Autumn Leaves", "album_id": catalog["portrait"].id}
    )

    plays = db_session.scalar(select(Track.number_of_plays).where(Track.title == "Autumn Leaves"))

    assert plays == 0


def test_delete_album_removes_tracks(music_service, db_session, catalog):
    album = catalog["kind_of_blue"]
    album_id = album.id

    music_service.delete_album(album)

    with pytest.raises(AlbumNotFoundError):
        music_service.get_album(album_id)
    assert _count(db_session, Track) == 0
    # Genres themselves survive, only the join rows go
    assert _count(db_session, Genre) == 2


def test_add_track_appends_after_last(music_service, catalog):
    track = music_service.add_track(catalog["kind_of_blue"], {"title": "Flamenco Sketches (Alternate Take)", "duration": 574})

    assert track.index == 6
    assert track.number_of_plays == 0
    assert track.album_id == catalog["kind_of_blue"].id


def test_add_first_track(music_service, catalog):
    track = music_service.add_track(catalog["spring"], {"title": "B Minor Waltz"})

    assert track.index == 1


def test_add_track_invalid(music_service, catalog):
    with pytest.raises(ChangesetError) as exc_info:
        music_service.add_track(catalog["spring"], {"title": "", "duration": 0})

    assert exc_info.value.errors == {
        "title": ["can't be blank"],
        "duration": ["must be greater than 0"],
    }


def test_create_genre(music_service, catalog):
    genre = music_service.create_genre({"name": "bebop", "wiki_tag": "Bebop"})

    assert genre.id is not None
    assert genre.name == "bebop"


def test_create_genre_with_taken_name(music_service, db_session, catalog):
    with pytest.raises(ChangesetError) as exc_info:
        music_service.create_genre({"name": "jazz"})

    assert exc_info.value.errors == {"name": ["has already been taken"]}
    assert _count(db_session, Genre) == 2

    # The session is usable again after the rollback
    assert music_service.create_genre({"name": "cool jazz"}).name == "cool jazz"


def test_tag_album(music_service, db_session, catalog):
    album = music_service.tag_album(catalog["spring"], ["live", "jazz", "live"])

    db_session.expire_all()
    reloaded = music_service.get_album(album.id, preload=("genres",))
    assert sorted(genre.name for genre in reloaded.genres) == ["jazz", "live"]


def test_tag_album_with_unknown_genre(music_service, catalog):
    with pytest.raises(GenreNotFoundError) as exc_info:
        music_service.tag_album(catalog["spring"], ["jazz", "polka"])

    assert "polka" in str(exc_info.value)


def test_create_artist_with_albums(music_service, catalog):
    artist = music_service.create_artist_with_albums(
        {"name": "John Coltrane", "birth_date": "1926-09-23"},
        [{"title": "Giant Steps"}, {"title": "A Love Supreme"}]
    )

    albums = music_service.all_albums_by_artist(artist)
    assert [album.title for album in albums] == ["A Love Supreme", "Giant Steps"]


def test_create_artist_with_invalid_album_rolls_back(music_service, db_session, catalog):
    artists_before = _count(db_session, Artist)
    albums_before = _count(db_session, Album)

    with pytest.raises(ChangesetError) as exc_info:
        music_service.create_artist_with_albums(
            {"name": "John Coltrane"},
            [{"title": "Giant Steps"}, {"title": ""}]
        )

    assert exc_info.value.errors == {"title": ["can't be blank"]}
    assert music_service.get_artist("John Coltrane") is None
    assert _count(db_session, Artist) == artists_before
    assert _count(db_session, Album) == albums_before


def test_transaction_rolls_back_on_error(music_service, db_session, catalog):
    with pytest.raises(RuntimeError):
        with music_service.transaction() as session:
            session.add(Artist(name="Chet Baker"))
            session.flush()
            raise RuntimeError("boom")

    assert music_service.get_artist("Chet Baker") is None


def test_nested_transaction_joins_outer(music_service, db_session, catalog):
    with pytest.raises(RuntimeError):
        with music_service.transaction():
            music_service.create_artist({"name": "Chet Baker"})
            raise RuntimeError("boom")

    assert music_service.get_artist("Chet Baker") is None


def test_transaction_commits(music_service, session_factory, catalog):
    with music_service.transaction() as session:
        session.add(Artist(name="Chet Baker"))

    other = session_factory()
    try:
        assert other.scalar(select(Artist).where(Artist.name == "Chet Baker")) is not None
    finally:
        other.close()
