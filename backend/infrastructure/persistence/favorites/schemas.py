from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

from domain.favorites import FavoriteRecord, FavoritesCollection


class FavoriteRecordModel(BaseModel):
    """Persisted shape of one favorite (JSON object inside the stored array)."""

    model_config = ConfigDict(extra="ignore")

    movie_id: int
    title: str
    poster_path: Optional[str] = ""
    vote_average: float = 0.0
    release_date: Optional[str] = ""
    added_at: str

    def to_domain(self) -> FavoriteRecord:
        return FavoriteRecord(
            movie_id=self.movie_id,
            title=self.title,
            poster_path=self.poster_path or "",
            vote_average=self.vote_average,
            release_date=self.release_date or "",
            added_at=self.added_at,
        )

    @classmethod
    def from_domain(cls, record: FavoriteRecord) -> "FavoriteRecordModel":
        return cls(
            movie_id=record.movie_id,
            title=record.title,
            poster_path=record.poster_path,
            vote_average=record.vote_average,
            release_date=record.release_date,
            added_at=record.added_at,
        )


_COLLECTION_ADAPTER = TypeAdapter(List[FavoriteRecordModel])


def parse_favorites(raw: str) -> FavoritesCollection:
    """Parse the stored JSON array; raises pydantic.ValidationError on any mismatch."""
    models = _COLLECTION_ADAPTER.validate_json(raw)
    return tuple(m.to_domain() for m in models)


def dump_favorites(favorites: FavoritesCollection) -> str:
    models = [FavoriteRecordModel.from_domain(r) for r in favorites]
    return _COLLECTION_ADAPTER.dump_json(models).decode("utf-8")
