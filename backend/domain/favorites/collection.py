from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, NamedTuple

from domain.favorites.favorite_record import FavoriteRecord, MovieSummary

FavoritesCollection = tuple[FavoriteRecord, ...]


class FavoritesState(NamedTuple):
    """Published view of the favorites: records, their ids and the loading flag."""

    favorites: FavoritesCollection
    favorite_ids: frozenset[int]
    loading: bool


EMPTY_STATE = FavoritesState(favorites=(), favorite_ids=frozenset(), loading=False)


def utc_timestamp(now: datetime | None = None) -> str:
    """Millisecond ISO-8601 UTC timestamp with a trailing 'Z'."""
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    current = current.astimezone(timezone.utc)
    return current.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def dedupe_records(records: Iterable[FavoriteRecord]) -> FavoritesCollection:
    """Keep the first record per movie_id, preserving order."""
    seen: set[int] = set()
    out: list[FavoriteRecord] = []
    for record in records:
        if record.movie_id in seen:
            continue
        seen.add(record.movie_id)
        out.append(record)
    return tuple(out)


def build_state(records: Iterable[FavoriteRecord], *, loading: bool = False) -> FavoritesState:
    """The only way a FavoritesState is derived from a list of records.

    The id index is computed from the same (deduplicated) tuple, so the two never
    disagree.
    """
    favorites = dedupe_records(records)
    return FavoritesState(
        favorites=favorites,
        favorite_ids=frozenset(r.movie_id for r in favorites),
        loading=loading,
    )


def toggle_membership(
    records: Iterable[FavoriteRecord],
    movie: MovieSummary,
    *,
    added_at: str,
) -> tuple[FavoritesCollection, bool]:
    """Flip membership of `movie` in `records`.

    Returns the new collection and whether the movie is now a favorite. Removal
    drops every record with the movie's id; insertion prepends.
    """
    current = tuple(records)
    movie_id = int(movie.id)
    if any(r.movie_id == movie_id for r in current):
        return tuple(r for r in current if r.movie_id != movie_id), False

    record = FavoriteRecord.from_movie(movie, added_at=added_at)
    return (record,) + current, True
