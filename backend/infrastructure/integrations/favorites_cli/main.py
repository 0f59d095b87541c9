from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace
from typing import Optional, Sequence

from application.favorites import FavoritesCacheManager, StorageError
from domain.favorites import MovieSummary
from infrastructure.bootstrap import build_favorites_manager
from infrastructure.config.favorites_storage import SUPPORTED_BACKENDS
from infrastructure.config.settings import FAVORITES_STORAGE, LOG_LEVEL
from infrastructure.utils import EventLogger

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Inspect and edit the favorite movies store.")
    p.add_argument(
        "--backend",
        default=None,
        choices=list(SUPPORTED_BACKENDS),
        help="Storage backend (default: FAVORITES_STORAGE_BACKEND / favorites_storage.yaml).",
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List favorites, newest first.")

    toggle = sub.add_parser("toggle", help="Add the movie if absent, remove it if present.")
    toggle.add_argument("--id", type=int, required=True, dest="movie_id")
    toggle.add_argument("--title", default="")
    toggle.add_argument("--poster-path", default="")
    toggle.add_argument("--vote-average", type=float, default=0.0)
    toggle.add_argument("--release-date", default="")

    check = sub.add_parser("check", help="Print whether a movie is a favorite.")
    check.add_argument("--id", type=int, required=True, dest="movie_id")
    return p


def _print_favorites(manager: FavoritesCacheManager) -> None:
    favorites, _ = manager.current_snapshot()
    if not favorites:
        print("No favorites.")
        return
    for i, fav in enumerate(favorites, 1):
        print(f"{i:2d}. [{fav.movie_id}] {fav.title:<40} {fav.release_date:<10} {fav.vote_average:4.1f}  {fav.added_at}")


async def _run(args: argparse.Namespace) -> int:
    config = FAVORITES_STORAGE
    if args.backend:
        config = replace(config, backend=args.backend)

    events = EventLogger(
        logger,
        "[favorites-cli]",
        base_fields={"command": args.command, "backend": config.backend, "key": config.key},
    )
    manager = build_favorites_manager(config=config)
    try:
        try:
            await manager.initialize()
        except StorageError:
            events.exception("load_failed")
            return 1
        events.info("loaded", count=len(manager.state.favorites))

        if args.command == "list":
            _print_favorites(manager)
            return 0

        if args.command == "check":
            print("yes" if manager.is_favorite(args.movie_id) else "no")
            return 0

        movie = MovieSummary(
            id=args.movie_id,
            title=args.title,
            poster_path=args.poster_path,
            vote_average=args.vote_average,
            release_date=args.release_date,
        )
        try:
            added = await manager.toggle(movie)
        except StorageError:
            events.exception("toggle_failed", movie_id=movie.id)
            return 1
        events.info("toggled", movie_id=movie.id, added=added)
        print("added" if added else "removed")
        return 0
    finally:
        await manager.close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _build_parser().parse_args(argv)
    raise SystemExit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
