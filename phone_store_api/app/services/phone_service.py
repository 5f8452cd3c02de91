"""
Service layer for the phone collection.

``PhoneService`` implements list, create, update, delete and bulk
replace on top of a ``PhoneStore``.  Records are open-ended JSON
objects; only the ``id`` field is interpreted, and only for lookup.
No schema validation is performed and the server never generates an
``id``.

Each mutating operation holds the store's writer lock around its full
read-modify-write cycle.  Store errors propagate to the caller, which
maps them to HTTP responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from phone_store_api.app.core.store import Phone, PhoneStore, StoreError


logger = logging.getLogger(__name__)


class PhoneService:
    """Business logic for phone records, bound to a store."""

    def __init__(self, store: PhoneStore) -> None:
        self.store = store

    async def list_phones(self) -> List[Phone]:
        """Return the full collection in stored order."""
        try:
            return self.store.load()
        except StoreError as exc:
            logger.error("Failed to read phones: %s", exc)
            raise

    async def create_phone(self, data: Dict[str, Any]) -> Phone:
        """Append a record built from ``data`` and return it."""
        phone = dict(data)
        try:
            with self.store.locked():
                phones = self.store.load()
                phones.append(phone)
                self.store.save(phones)
        except StoreError as exc:
            logger.error("Failed to add phone: %s", exc)
            raise
        logger.info("Created phone %s", phone.get("id"))
        return phone

    async def update_phone(self, phone_id: str, data: Dict[str, Any]) -> Optional[Phone]:
        """Merge ``data`` into the first record whose ``id`` matches.

        Fields absent from ``data`` are kept, fields present overwrite.
        Returns the merged record, or ``None`` (without writing) if no
        record matches.
        """
        try:
            with self.store.locked():
                phones = self.store.load()
                index = next(
                    (i for i, phone in enumerate(phones) if _matches(phone, phone_id)),
                    None,
                )
                if index is None:
                    return None
                phones[index] = {**phones[index], **data}
                self.store.save(phones)
        except StoreError as exc:
            logger.error("Failed to update phone %s: %s", phone_id, exc)
            raise
        logger.info("Updated phone %s", phone_id)
        return phones[index]

    async def delete_phone(self, phone_id: str) -> bool:
        """Remove every record whose ``id`` matches.

        Returns ``True`` if at least one record was removed.  The
        collection is only rewritten when something was removed.
        """
        try:
            with self.store.locked():
                phones = self.store.load()
                remaining = [phone for phone in phones if not _matches(phone, phone_id)]
                removed = len(phones) - len(remaining)
                if not removed:
                    return False
                self.store.save(remaining)
        except StoreError as exc:
            logger.error("Failed to delete phone %s: %s", phone_id, exc)
            raise
        logger.info("Deleted %d phone(s) with id %s", removed, phone_id)
        return True

    async def replace_phones(self, data: bytes) -> List[Phone]:
        """Overwrite the stored document with ``data`` and re-read it.

        The bytes are written before they are parsed.  If they turn out
        not to be a JSON array the store keeps them and the parse error
        is raised; there is no rollback.
        """
        try:
            with self.store.locked():
                self.store.replace_raw(data)
                phones = self.store.load()
        except StoreError as exc:
            logger.error("Failed to replace phones: %s", exc)
            raise
        logger.info("Replaced phone collection with %d record(s)", len(phones))
        return phones


def _matches(phone: Any, phone_id: str) -> bool:
    return isinstance(phone, dict) and phone.get("id") == phone_id
