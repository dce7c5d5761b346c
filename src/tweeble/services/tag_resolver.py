"""Find-or-create peep tags by exact name."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tweeble.models.tag import Tag

logger = logging.getLogger(__name__)

__all__ = ["TagResolver"]


class TagResolver:
    """Resolve mention names to persisted ``Tag`` rows.

    Lookups use exact string equality, so ``Bob`` and ``bob`` are distinct
    tags. Results are cached per resolver, which is scoped to one unit of work.
    """

    def __init__(self, db: Session) -> None:
        """Initialize the resolver with the session of the current request."""
        self.db = db
        self._cache: dict[str, Tag] = {}

    def _lookup(self, name: str) -> Tag | None:
        return self.db.execute(select(Tag).where(Tag.name == name)).scalars().first()

    def resolve(self, name: str) -> Tag:
        """Return the tag called ``name``, creating it if needed.

        The insert runs in a SAVEPOINT. When a concurrent request creates the
        same name first, the unique constraint rejects ours, the savepoint is
        rolled back and the winning row is read instead.
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        tag = self._lookup(name)
        if tag is None:
            tag = Tag(name=name)
            try:
                with self.db.begin_nested():
                    self.db.add(tag)
            except IntegrityError:
                logger.info("Tag %r created concurrently; reusing existing row", name)
                tag = self._lookup(name)
                if tag is None:
                    raise
            else:
                logger.info("Created tag %r (id=%s)", name, tag.id)

        self._cache[name] = tag
        return tag

    def resolve_all(self, names: Iterable[str]) -> list[Tag]:
        """Resolve ``names`` to distinct tags in first-occurrence order."""
        tags: list[Tag] = []
        seen: set[int] = set()
        for name in names:
            tag = self.resolve(name)
            if tag.id in seen:
                continue
            seen.add(tag.id)
            tags.append(tag)
        return tags
