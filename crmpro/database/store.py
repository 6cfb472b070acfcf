"""Flat-file document store for CRMPro.

All state lives in one JSON document ``{"users": [...], "contacts": []}``.
Every write replaces the whole document; there is no locking, so two
overlapping read-modify-write sequences end with the last writer's copy.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from crmpro.models.store_document import StoreDocument

load_dotenv()

logger = logging.getLogger(__name__)

DATA_FILE = os.getenv("DATA_FILE", "./data/db.json")


class DocumentStore:
    """Interface for whole-document persistence."""

    def read(self) -> StoreDocument:
        raise NotImplementedError

    def write(self, doc: StoreDocument) -> None:
        raise NotImplementedError


class JsonFileStore(DocumentStore):
    """Store backed by a single JSON file on local disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _initialize(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._dump(StoreDocument().to_record())
        logger.info(f"Initialized empty store document at {self.path}")

    def _dump(self, record: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(record, f, ensure_ascii=False, indent=2)

    def read(self) -> StoreDocument:
        """Return the current document, creating an empty one if absent."""
        if not self.path.exists():
            self._initialize()
        with open(self.path, "r", encoding="utf-8") as f:
            record = json.load(f)
        doc = StoreDocument.model_validate(record)
        logger.debug(f"Read store document: {len(doc.users)} users")
        return doc

    def write(self, doc: StoreDocument) -> None:
        """Overwrite the file with the full document."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._dump(doc.to_record())
        except (OSError, TypeError) as e:
            logger.error(f"Failed to write store document {self.path}: {type(e).__name__}: {str(e)}")
            raise
        logger.debug(f"Wrote store document: {len(doc.users)} users")


class InMemoryStore(DocumentStore):
    """Process-local store with the same whole-document semantics."""

    def __init__(self, initial: Optional[StoreDocument] = None):
        self._record = (initial or StoreDocument()).to_record()

    def read(self) -> StoreDocument:
        return StoreDocument.model_validate(copy.deepcopy(self._record))

    def write(self, doc: StoreDocument) -> None:
        self._record = doc.to_record()


_store: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    """FastAPI dependency returning the process-wide store.

    Tests override this with an in-memory store.
    """
    global _store
    if _store is None:
        _store = JsonFileStore(DATA_FILE)
    return _store
