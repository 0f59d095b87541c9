from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from application.favorites.broadcast import Listener, StateBroadcaster, Unsubscribe
from application.favorites.errors import StorageLoadError, StorageWriteError
from application.ports.favorites_store_port import FavoritesStorePort
from domain.favorites import (
    EMPTY_STATE,
    FavoritesCollection,
    FavoritesState,
    MovieSummary,
    build_state,
    toggle_membership,
    utc_timestamp,
)

logger = logging.getLogger(__name__)


class FavoritesCacheManager:
    """Shared, observable in-memory projection of the persisted favorites.

    Every mutation goes through `toggle`, which re-reads the store, writes the
    full collection back and only then publishes. Toggles and reloads run one at
    a time so a read-modify-write never sees state older than the previous write.
    Reads (`is_favorite`, `state`, `current_snapshot`) never touch the store.
    """

    def __init__(
        self,
        *,
        store: FavoritesStorePort,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._broadcaster: StateBroadcaster[FavoritesState] = StateBroadcaster(EMPTY_STATE)
        self._lock = asyncio.Lock()
        self._init_task: Optional[asyncio.Task[None]] = None
        self._toggles: set[asyncio.Task[bool]] = set()

    # ---- reads -------------------------------------------------------------

    @property
    def state(self) -> FavoritesState:
        return self._broadcaster.state

    def current_snapshot(self) -> tuple[FavoritesCollection, bool]:
        state = self._broadcaster.state
        return state.favorites, state.loading

    def is_favorite(self, movie_id: int) -> bool:
        return int(movie_id) in self._broadcaster.state.favorite_ids

    # ---- subscriptions -----------------------------------------------------

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._broadcaster.subscribe(listener)

    async def attach(self, listener: Listener) -> Unsubscribe:
        """Subscribe and make sure the favorites have been loaded once.

        The listener is called with the current state right away. Load failures
        are logged here; the listener still receives the (empty) published state.
        """
        unsubscribe = self._broadcaster.subscribe(listener)
        self._broadcaster.replay(listener)
        try:
            await self.initialize()
        except StorageLoadError:
            logger.warning("favorites initial load failed; continuing with empty favorites")
        return unsubscribe

    # ---- loading -----------------------------------------------------------

    async def initialize(self) -> None:
        """Load favorites from storage once per manager.

        Concurrent and later callers await the same load. A StorageLoadError is
        re-raised to every awaiting caller after the empty state was published.
        """
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self.refresh())
        await asyncio.shield(self._init_task)

    async def refresh(self) -> None:
        """Reload favorites from storage.

        On a read failure the previously published favorites are kept (empty on
        the very first load) and the error is re-raised.
        """
        async with self._lock:
            previous = self._broadcaster.state
            self._publish(previous._replace(loading=True))
            try:
                favorites = await self._store.load_for_update()
            except StorageLoadError:
                self._publish(previous._replace(loading=False))
                raise
            self._publish(build_state(favorites, loading=False))
            logger.info("favorites loaded: count=%s", len(favorites))

    # ---- mutation ----------------------------------------------------------

    async def toggle(self, movie: MovieSummary) -> bool:
        """Flip favorite membership of `movie`; returns True when it is now a favorite.

        Raises StorageLoadError / StorageWriteError without touching the published
        state, so a caller holding an optimistic UI update should revert it.
        Cancelling the caller does not cancel the toggle: the read, save and
        publish still run to completion.
        """
        task = asyncio.ensure_future(self._toggle_locked(movie))
        self._toggles.add(task)
        task.add_done_callback(self._toggle_done)
        return await asyncio.shield(task)

    def _toggle_done(self, task: asyncio.Task[bool]) -> None:
        self._toggles.discard(task)
        # The caller may have been cancelled; mark the outcome as retrieved.
        if not task.cancelled():
            task.exception()

    async def _toggle_locked(self, movie: MovieSummary) -> bool:
        async with self._lock:
            current = await self._store.load_for_update()
            updated, is_favorite = toggle_membership(
                current,
                movie,
                added_at=utc_timestamp(self._clock() if self._clock else None),
            )
            try:
                await self._store.save(updated)
            except StorageWriteError:
                logger.warning(
                    "favorites toggle not saved: movie_id=%s wanted=%s",
                    movie.id,
                    "added" if is_favorite else "removed",
                )
                raise

            self._publish(build_state(updated))
            logger.info(
                "favorites toggled: movie_id=%s result=%s count=%s",
                movie.id,
                "added" if is_favorite else "removed",
                len(updated),
            )
            return is_favorite

    async def close(self) -> None:
        self._broadcaster.clear()
        await self._store.close()

    def _publish(self, state: FavoritesState) -> None:
        self._broadcaster.publish(state)
