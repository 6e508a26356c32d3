"""In-memory document store for testing.

Mirrors the subset of pymongo's async collection API the repositories
use, and returns pymongo's own result types. ``calls`` counts operations
per collection so tests can assert how many queries a read issued.
"""

from collections import Counter
from copy import deepcopy
from typing import Any, AsyncIterator

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertManyResult, InsertOneResult, UpdateResult

from .matching import matches, run_pipeline, sort_documents


class InMemoryCursor:
    """Lazy find cursor supporting sort/skip/limit chaining."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents
        self._sort: list[tuple[str, int]] = []
        self._skip = 0
        self._limit = 0

    def sort(self, key_or_list: Any, direction: int | None = None) -> "InMemoryCursor":
        if isinstance(key_or_list, str):
            self._sort = [(key_or_list, direction or ASCENDING)]
        elif isinstance(key_or_list, dict):
            self._sort = list(key_or_list.items())
        else:
            self._sort = list(key_or_list)
        return self

    def skip(self, skip: int) -> "InMemoryCursor":
        if skip < 0:
            raise ValueError("skip must be >= 0")
        self._skip = skip
        return self

    def limit(self, limit: int) -> "InMemoryCursor":
        # As in MongoDB, a limit of 0 means no limit
        self._limit = abs(limit)
        return self

    def _results(self) -> list[dict[str, Any]]:
        documents = sort_documents(self._documents, self._sort)
        documents = documents[self._skip :]
        if self._limit:
            documents = documents[: self._limit]
        return deepcopy(documents)

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        results = self._results()
        return results[:length] if length else results

    async def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        for document in self._results():
            yield document


class InMemoryCommandCursor:
    """Cursor over aggregation results."""

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self._rows = rows

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._rows[:length] if length else list(self._rows)

    async def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        for row in self._rows:
            yield row


class InMemoryCollection:
    """In-memory collection with unique ``_id``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: Counter[str] = Counter()
        self._documents: list[dict[str, Any]] = []

    def _matching(self, query: dict[str, Any] | None) -> list[dict[str, Any]]:
        return [d for d in self._documents if matches(d, query or {})]

    def find(self, filter: dict[str, Any] | None = None) -> InMemoryCursor:
        self.calls["find"] += 1
        return InMemoryCursor(self._matching(filter))

    async def find_one(self, filter: dict[str, Any] | None = None) -> dict[str, Any] | None:
        self.calls["find_one"] += 1
        found = self._matching(filter)
        return deepcopy(found[0]) if found else None

    async def insert_one(self, document: dict[str, Any]) -> InsertOneResult:
        self.calls["insert_one"] += 1
        stored = deepcopy(document)
        stored.setdefault("_id", ObjectId())

        if any(d["_id"] == stored["_id"] for d in self._documents):
            raise DuplicateKeyError(
                f"E11000 duplicate key error collection: {self.name} index: _id_",
                11000,
            )

        self._documents.append(stored)
        return InsertOneResult(stored["_id"], True)

    async def insert_many(self, documents: list[dict[str, Any]]) -> InsertManyResult:
        inserted = [(await self.insert_one(d)).inserted_id for d in documents]
        return InsertManyResult(inserted, True)

    async def replace_one(
        self,
        filter: dict[str, Any],
        replacement: dict[str, Any],
        upsert: bool = False,
    ) -> UpdateResult:
        self.calls["replace_one"] += 1

        for index, existing in enumerate(self._documents):
            if matches(existing, filter):
                stored = deepcopy(replacement)
                stored["_id"] = existing["_id"]
                modified = stored != existing
                self._documents[index] = stored
                return UpdateResult({"n": 1, "nModified": int(modified), "ok": 1.0}, True)

        if upsert:
            stored = deepcopy(replacement)
            stored.setdefault("_id", filter.get("_id", ObjectId()))
            self._documents.append(stored)
            return UpdateResult(
                {"n": 1, "nModified": 0, "upserted": stored["_id"], "ok": 1.0}, True
            )

        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

    async def update_many(
        self, filter: dict[str, Any], update: dict[str, Any]
    ) -> UpdateResult:
        self.calls["update_many"] += 1

        unsupported = set(update) - {"$set"}
        if unsupported:
            raise NotImplementedError(f"Unsupported update operators: {unsupported}")

        matched = modified = 0
        for document in self._matching(filter):
            matched += 1
            changes = {k: v for k, v in update.get("$set", {}).items() if document.get(k) != v}
            if changes:
                document.update(deepcopy(changes))
                modified += 1

        return UpdateResult({"n": matched, "nModified": modified, "ok": 1.0}, True)

    async def aggregate(self, pipeline: list[dict[str, Any]]) -> InMemoryCommandCursor:
        self.calls["aggregate"] += 1
        return InMemoryCommandCursor(run_pipeline(self._documents, pipeline))


class InMemoryDatabase:
    """In-memory stand-in for ``AsyncDatabase``; collections appear on access."""

    def __init__(self, name: str = "board") -> None:
        self.name = name
        self._collections: dict[str, InMemoryCollection] = {}

    def __getitem__(self, name: str) -> InMemoryCollection:
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(name)
        return self._collections[name]

    def get_collection(self, name: str) -> InMemoryCollection:
        return self[name]
