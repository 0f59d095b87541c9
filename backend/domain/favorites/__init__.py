from domain.favorites.collection import (
    EMPTY_STATE,
    FavoritesCollection,
    FavoritesState,
    build_state,
    dedupe_records,
    toggle_membership,
    utc_timestamp,
)
from domain.favorites.favorite_record import FavoriteRecord, MovieSummary

__all__ = [
    "EMPTY_STATE",
    "FavoriteRecord",
    "FavoritesCollection",
    "FavoritesState",
    "MovieSummary",
    "build_state",
    "dedupe_records",
    "toggle_membership",
    "utc_timestamp",
]
