import json
import logging
import os
import threading
from datetime import datetime, timezone

from config import KB_STORE_PATH

log = logging.getLogger(__name__)


class EntryNotFound(KeyError):
    pass


class InvalidEntry(ValueError):
    pass


def _now():
    return datetime.now(timezone.utc).isoformat()


def _validate(question: str, answer: str):
    if not question or not question.strip():
        raise InvalidEntry("'question' must not be empty")
    if not answer or not answer.strip():
        raise InvalidEntry("'answer' must not be empty")


class KnowledgeBase:
    """Question/answer pairs served to support agents, keyed by an integer id."""

    def __init__(self, path=None):
        self.path = path
        self.lock = threading.Lock()
        self.entries = {}
        self.next_id = 1
        self._load()

    def _save(self):
        """Must be called while holding the lock."""
        if not self.path:
            return
        data = {
            "next_id": self.next_id,
            "entries": [self.entries[k] for k in sorted(self.entries)],
        }
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError("store must hold a JSON object")
            self.entries = {item["id"]: item for item in data.get("entries", [])}
            self.next_id = data.get("next_id", max(self.entries, default=0) + 1)
        except (json.JSONDecodeError, KeyError, TypeError):
            log.warning("Knowledge base store %s is corrupted, starting empty", self.path)
            self.entries = {}
            self.next_id = 1

    def get_all(self):
        with self.lock:
            return [dict(self.entries[k]) for k in sorted(self.entries)]

    def get(self, entry_id: int) -> dict:
        with self.lock:
            if entry_id not in self.entries:
                raise EntryNotFound(entry_id)
            return dict(self.entries[entry_id])

    def create(self, question: str, answer: str) -> dict:
        _validate(question, answer)
        with self.lock:
            now = _now()
            entry = {
                "id": self.next_id,
                "question": question,
                "answer": answer,
                "created_at": now,
                "updated_at": now,
            }
            self.entries[entry["id"]] = entry
            self.next_id += 1
            self._save()
            log.info("Created Q&A pair %s", entry["id"])
            return dict(entry)

    def update(self, entry_id: int, question: str, answer: str) -> dict:
        _validate(question, answer)
        with self.lock:
            if entry_id not in self.entries:
                raise EntryNotFound(entry_id)
            entry = self.entries[entry_id]
            entry["question"] = question
            entry["answer"] = answer
            entry["updated_at"] = _now()
            self._save()
            log.info("Updated Q&A pair %s", entry_id)
            return dict(entry)

    def delete(self, entry_id: int) -> None:
        with self.lock:
            if entry_id not in self.entries:
                raise EntryNotFound(entry_id)
            del self.entries[entry_id]
            self._save()
            log.info("Deleted Q&A pair %s", entry_id)

    def search(self, query: str):
        """Case-insensitive substring match against question or answer."""
        q = (query or "").lower()
        return [
            e for e in self.get_all()
            if q in e["question"].lower() or q in e["answer"].lower()
        ]

    def count(self):
        with self.lock:
            return len(self.entries)


# Singleton instance
knowledge_base = KnowledgeBase(KB_STORE_PATH)
