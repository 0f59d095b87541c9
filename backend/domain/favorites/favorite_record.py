from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_float(value: Any) -> float:
    try:
        return float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class MovieSummary:
    """The display fields of a movie as handed over by the metadata provider."""

    id: int
    title: str
    poster_path: str = ""
    vote_average: float = 0.0
    release_date: str = ""

    @classmethod
    def from_tmdb(cls, payload: Mapping[str, Any]) -> "MovieSummary":
        """Build a summary from a raw TMDB movie dict (list or detail endpoint)."""
        raw_id = payload.get("id")
        if raw_id is None:
            raise ValueError("TMDB payload has no 'id'")
        return cls(
            id=int(raw_id),
            title=_as_str(payload.get("title") or payload.get("name")),
            poster_path=_as_str(payload.get("poster_path")),
            vote_average=_as_float(payload.get("vote_average")),
            release_date=_as_str(payload.get("release_date")),
        )


@dataclass(frozen=True)
class FavoriteRecord:
    """A favorited movie, snapshotted at the time it was favorited."""

    movie_id: int
    title: str
    poster_path: str = ""
    vote_average: float = 0.0
    release_date: str = ""
    # ISO-8601 UTC, e.g. 2024-05-01T12:30:00.000Z
    added_at: str = ""

    @classmethod
    def from_movie(cls, movie: MovieSummary, *, added_at: str) -> "FavoriteRecord":
        return cls(
            movie_id=int(movie.id),
            title=movie.title,
            poster_path=movie.poster_path or "",
            vote_average=float(movie.vote_average or 0.0),
            release_date=movie.release_date or "",
            added_at=added_at,
        )
