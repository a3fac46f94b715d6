import heapq
import json
import logging
import os
import threading

from config import QUEUE_STORE_PATH
from priority import Priority

log = logging.getLogger(__name__)


class RequestQueue:
    """
    Customer requests ordered by priority, oldest first within the same priority.
    Every public method takes the lock; persistence is optional.
    """

    def __init__(self, path=None):
        self.path = path
        self.lock = threading.Lock()
        self.heap = []
        self.counter = 0  # breaks ties so older requests surface first
        self._load()

    def _save(self):
        """Persist the current queue to disk. Must be called while holding the lock."""
        if not self.path:
            return
        data = {
            "counter": self.counter,
            "requests": [
                {"rank": rank, "seq": seq, "request": req}
                for rank, seq, req in self.heap
            ],
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
            self.counter = data.get("counter", 0)
            self.heap = [
                (item["rank"], item["seq"], item["request"])
                for item in data.get("requests", [])
            ]
            heapq.heapify(self.heap)
        except (json.JSONDecodeError, KeyError, TypeError):
            log.warning("Queue store %s is corrupted, starting empty", self.path)
            self.heap = []
            self.counter = 0

    def add_request(self, request):
        """Queue a request dict whose "priority" field holds a priority label."""
        rank = Priority(request["priority"]).rank
        with self.lock:
            self.counter += 1
            heapq.heappush(self.heap, (rank, self.counter, request))
            self._save()

    def get_next_request(self):
        """Removes and returns the most severe, oldest request, or None."""
        with self.lock:
            if not self.heap:
                return None
            _, _, request = heapq.heappop(self.heap)
            self._save()
            return request

    def peek_queue(self, limit=10):
        """Sorted snapshot of up to `limit` requests without removing them."""
        with self.lock:
            ordered = sorted(self.heap, key=lambda item: (item[0], item[1]))
            return [req for _, _, req in ordered[:limit]]

    def get_queue_size(self):
        with self.lock:
            return len(self.heap)

    def clear(self):
        with self.lock:
            self.heap = []
            self.counter = 0
            self._save()


# Singleton instance
request_queue = RequestQueue(QUEUE_STORE_PATH)
