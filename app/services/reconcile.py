"""Reconciling upsert: make the rows stored under a parent equal an incoming list.

Flow (one transaction):
  1. Lock the parent row (SELECT ... FOR UPDATE); 404 if it does not exist
  2. Load the parent's current rows keyed by the match column
  3. Update rows whose key matches, insert the rest (reusing free supplied ids)
  4. Delete every stored row of the parent that was not kept
  5. Commit, or roll everything back on any error

The same routine serves every child collection; a ``Collection`` says which
columns play which role.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.exceptions import NotFoundError
from app.models.base import Base, new_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    """How a child collection is stored under its parent.

    ``match_attr`` defaults to ``id_attr``; students match on ``nisn`` instead.
    ``parent_attr`` None means the collection has no single parent: existing
    rows are looked up by the incoming ids only and nothing is ever deleted.
    """

    name: str
    model: type[Base]
    id_attr: str
    fields: tuple[str, ...]
    parent_attr: Optional[str] = None
    parent_model: Optional[type[Base]] = None
    match_attr: Optional[str] = None
    insert_only: tuple[str, ...] = ()
    delete_stale: bool = True

    @property
    def key_attr(self) -> str:
        return self.match_attr or self.id_attr

    def column(self, attr: str):
        return getattr(self.model, attr)


@dataclass
class ReconcileResult:
    kept_ids: list[str] = field(default_factory=list)
    inserted: int = 0
    updated: int = 0
    deleted: int = 0


async def lock_parent(db: AsyncSession, collection: Collection, parent_id: str) -> None:
    """Row-lock the parent so concurrent reconciliations of it run one after another."""
    parent_model = collection.parent_model
    if parent_model is None:
        return
    pk = parent_model.__mapper__.primary_key[0]
    result = await db.execute(select(pk).where(pk == parent_id).with_for_update())
    if result.scalar_one_or_none() is None:
        raise NotFoundError(f"{parent_model.__name__} not found")


async def _load_existing(
    db: AsyncSession,
    collection: Collection,
    parent_id: Optional[str],
    records: Sequence[Mapping[str, Any]],
) -> dict[Any, Base]:
    key_col = collection.column(collection.key_attr)
    if collection.parent_attr is not None:
        query = select(collection.model).where(
            collection.column(collection.parent_attr) == parent_id
        )
    else:
        keys = {r.get(collection.key_attr) for r in records} - {None}
        if not keys:
            return {}
        query = select(collection.model).where(key_col.in_(keys))
    result = await db.execute(query)
    return {getattr(row, collection.key_attr): row for row in result.scalars().all()}


async def _taken_ids(
    db: AsyncSession, collection: Collection, candidate_ids: set[str]
) -> set[str]:
    """Return the candidate ids already used by some row, e.g. under another parent."""
    if not candidate_ids:
        return set()
    id_col = collection.column(collection.id_attr)
    result = await db.execute(select(id_col).where(id_col.in_(candidate_ids)))
    return set(result.scalars().all())


async def apply(
    db: AsyncSession,
    collection: Collection,
    parent_id: Optional[str],
    records: Sequence[Mapping[str, Any]],
) -> ReconcileResult:
    """Reconcile inside the caller's transaction. Use ``reconcile`` for a standalone call."""
    res = ReconcileResult()
    await lock_parent(db, collection, parent_id)

    rows = await _load_existing(db, collection, parent_id, records)
    existing_ids = {getattr(row, collection.id_attr) for row in rows.values()}
    supplied = {r.get(collection.id_attr) for r in records} - {None} - existing_ids
    taken = await _taken_ids(db, collection, supplied)

    kept: dict[str, None] = {}
    for record in records:
        key = record.get(collection.key_attr)
        row = rows.get(key) if key is not None else None

        if row is not None:
            # Matches a stored row or one inserted earlier in this batch
            for attr in collection.fields:
                setattr(row, attr, record.get(attr))
            row.touch()
            if getattr(row, collection.id_attr) in existing_ids:
                res.updated += 1
        else:
            row_id = record.get(collection.id_attr)
            if row_id is None or row_id in taken or row_id in existing_ids or row_id in kept:
                row_id = new_id()
            values = {attr: record.get(attr) for attr in (*collection.fields, *collection.insert_only)}
            values[collection.id_attr] = row_id
            if collection.match_attr:
                values[collection.match_attr] = key
            if collection.parent_attr is not None:
                values[collection.parent_attr] = parent_id
            row = collection.model(**values)
            db.add(row)
            if key is None:
                key = row_id if collection.key_attr == collection.id_attr else None
            if key is not None:
                rows[key] = row
            res.inserted += 1
            logger.debug("Inserting %s %s for parent %s", collection.name, row_id, parent_id)

        kept[getattr(row, collection.id_attr)] = None

    res.kept_ids = list(kept)
    await db.flush()

    if collection.delete_stale and collection.parent_attr is not None:
        # NOT IN over an empty list is rendered correctly and deletes every row
        stmt = (
            delete(collection.model)
            .where(
                collection.column(collection.parent_attr) == parent_id,
                collection.column(collection.id_attr).not_in(res.kept_ids),
            )
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        res.deleted = result.rowcount or 0
        for row in rows.values():
            if getattr(row, collection.id_attr) not in kept and row in db:
                db.expunge(row)

    logger.info(
        "Reconciled %s for %s: %d updated, %d inserted, %d deleted",
        collection.name,
        parent_id,
        res.updated,
        res.inserted,
        res.deleted,
    )
    return res


async def reconcile(
    db: AsyncSession,
    collection: Collection,
    parent_id: Optional[str],
    records: Sequence[Mapping[str, Any]],
) -> ReconcileResult:
    """Replace the parent's collection with ``records`` atomically."""
    async with transaction(db):
        return await apply(db, collection, parent_id, records)
