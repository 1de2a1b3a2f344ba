"""Page model and a MongoDB-backed store that can run in no-op mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pymongo import MongoClient
from pymongo.errors import PyMongoError

DATABASE_NAME = "webCrawlerArchive"
COLLECTION_NAME = "webpages"


@dataclass
class Webpage:
    """A crawled page."""

    url: str
    title: str = ""
    content: str = ""
    word_count: int = 0

    def to_document(self) -> dict[str, Any]:
        """Return the document stored in the database."""
        return {
            "url": self.url,
            "title": self.title,
            "content": self.content,
            "wordCount": self.word_count,
        }


class Store:
    """Writes pages to MongoDB; when ``access`` is false every insert is skipped."""

    def __init__(self, uri: str, access: bool) -> None:
        self.client: MongoClient | None = None
        self.collection = None
        if not access:
            return
        self.client = MongoClient(uri)
        self.collection = self.client[DATABASE_NAME][COLLECTION_NAME]
        # Fresh start: wipe whatever a previous run left behind.
        self.collection.delete_many({})

    def insert(self, doc: Webpage | Mapping[str, Any]) -> Any:
        """Insert one document; return its id, or ``None`` if skipped or failed."""
        if self.client is None:
            print("Skipping insert: no MongoDB client")
            return None
        document = doc.to_document() if isinstance(doc, Webpage) else dict(doc)
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as exc:
            print("MongoDB insert error:", exc)
            return None
        print("Inserted:", result.inserted_id)
        return result.inserted_id

    def close(self) -> None:
        """Disconnect from the database, if connected."""
        if self.client is not None:
            self.client.close()

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()