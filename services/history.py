import json
import os
import time
import logging
import uuid
from urllib.parse import urlparse
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

import config
from services.models import AdItem

logger = logging.getLogger(__name__)


class HistoryEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: int = Field(default_factory=lambda: int(time.time() * 1000), alias="createdAt")
    label: str
    ads: List[AdItem] = []
    url: Optional[str] = None
    custom_prompt: Optional[str] = Field(default=None, alias="customPrompt")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class HistoryStore:
    """Bounded, newest-first list of generated ad batches."""

    def __init__(self, limit=config.HISTORY_LIMIT):
        self.limit = limit

    def load(self) -> List[HistoryEntry]:
        raise NotImplementedError

    def save(self, entries: List[HistoryEntry]):
        raise NotImplementedError

    def append(self, entry: HistoryEntry) -> HistoryEntry:
        entries = [entry] + self.load()
        self.save(entries[:self.limit])
        return entry

    def clear(self):
        self.save([])


class MemoryHistoryStore(HistoryStore):
    def __init__(self, limit=config.HISTORY_LIMIT):
        super().__init__(limit)
        self._entries = []

    def load(self):
        return list(self._entries)

    def save(self, entries):
        self._entries = list(entries)


class JsonFileHistoryStore(HistoryStore):
    """History kept in a JSON file, the way the browser UI keeps it in localStorage."""

    def __init__(self, path, limit=config.HISTORY_LIMIT):
        super().__init__(limit)
        self.path = path

    def load(self):
        """Load history from the JSON file.

        A missing or unreadable file is empty history. Invalid entries are
        skipped so the valid ones survive the next save.
        """
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError:
            logger.warning("History file %s is not valid JSON", self.path)
            return []
        if not isinstance(data, list):
            return []

        entries = []
        for item in data:
            try:
                entries.append(HistoryEntry.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid history entry: %s", e.errors()[0].get("msg"))
        return entries

    def save(self, entries):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in entries], f, ensure_ascii=False, indent=4)


def make_label(url=None, variant_of=None, target_language=None):
    """Short history label: host name, variation title, or translation target."""
    if target_language:
        return f"Translation to {target_language}"
    if variant_of is not None:
        return f"Variations: {variant_of.title[:24]}"
    if url:
        host = urlparse(url).hostname or url
        return host.replace("www.", "")
    return "Ads"
