"""
record_store.py - Record store adapter
Single responsibility: create/update/delete books and push full snapshots to subscribers.

Every delivery is the complete, authoritative book list (oldest first). Writes
made through this adapter are pushed as soon as they commit; commits from other
connections to the same database file are picked up by the watcher thread,
which polls ``PRAGMA data_version``.
"""

import logging
import sqlite3
import threading
from typing import Callable

from bookshelf.config import POLL_INTERVAL_SECONDS
from bookshelf.database.connection import data_version, get_connection
from bookshelf.database.repositories import books as book_repo
from bookshelf.domain.errors import RecordNotFoundError, StoreOperationError
from bookshelf.domain.models import Book

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[list[Book]], None]


class RecordStore:
    def __init__(self, poll_interval: float = POLL_INTERVAL_SECONDS):
        self.poll_interval = poll_interval
        self._listeners: list[SnapshotListener] = []
        self._last_snapshot: list[Book] | None = None
        # Serializes write+publish against the watcher; listeners may write back
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._watcher: threading.Thread | None = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def snapshot(self) -> list[Book]:
        try:
            return book_repo.list_all()
        except sqlite3.Error as e:
            raise StoreOperationError(f"Failed to load books: {e}") from e

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: dict) -> int:
        with self._lock:
            try:
                book_id = book_repo.create(fields)
            except sqlite3.Error as e:
                raise StoreOperationError(f"Failed to add book: {e}") from e
            logger.info("Book added: %s", fields.get("title"))
            self._publish()
        return book_id

    def update(self, book_id: int, fields: dict) -> None:
        with self._lock:
            try:
                found = book_repo.update(book_id, fields)
            except sqlite3.Error as e:
                raise StoreOperationError(f"Failed to update book {book_id}: {e}") from e
            if not found:
                raise RecordNotFoundError(book_id)
            logger.info("Book updated: %s", fields.get("title", book_id))
            self._publish()

    def delete(self, book_id: int) -> None:
        with self._lock:
            try:
                found = book_repo.delete(book_id)
            except sqlite3.Error as e:
                raise StoreOperationError(f"Failed to delete book {book_id}: {e}") from e
            if not found:
                raise RecordNotFoundError(book_id)
            logger.info("Book deleted: %s", book_id)
            self._publish()

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, callback: SnapshotListener) -> None:
        """Register callback and deliver the current book list right away."""
        with self._lock:
            books = self.snapshot()
            self._listeners.append(callback)
            self._last_snapshot = books
            self._deliver(callback, books)

    def _publish(self, books: list[Book] | None = None) -> None:
        if books is None:
            try:
                books = self.snapshot()
            except StoreOperationError:
                # the watcher retries once the database is readable again
                logger.error("Failed to reload books after write", exc_info=True)
                return
        self._last_snapshot = books
        listeners = list(self._listeners)
        logger.debug("Publishing snapshot of %d books to %d listeners", len(books), len(listeners))
        for callback in listeners:
            self._deliver(callback, books)

    def _deliver(self, callback: SnapshotListener, books: list[Book]) -> None:
        try:
            callback(list(books))
        except Exception:
            logger.exception("Snapshot listener failed")

    # ------------------------------------------------------------------
    # Watcher for commits made by other clients
    # ------------------------------------------------------------------

    def start_watching(self) -> None:
        if self._watcher and self._watcher.is_alive():
            return
        self._stop_event.clear()
        self._watcher = threading.Thread(target=self._watch_loop, daemon=True)
        self._watcher.start()

    def stop(self) -> None:
        self._stop_event.set()
        if self._watcher:
            self._watcher.join(timeout=self.poll_interval * 2)
            self._watcher = None

    def _watch_loop(self) -> None:
        conn = None
        try:
            conn = get_connection()
            version = data_version(conn)
        except (sqlite3.Error, OSError):
            logger.exception("Store watcher could not open the database; remote changes will not be picked up")
            if conn is not None:
                conn.close()
            return
        try:
            while not self._stop_event.wait(self.poll_interval):
                with self._lock:
                    try:
                        current = data_version(conn)
                        if current == version:
                            continue
                        version = current
                        books = self.snapshot()
                    except (sqlite3.Error, StoreOperationError):
                        logger.warning("Store watcher poll failed", exc_info=True)
                        continue
                    if books != self._last_snapshot:
                        self._publish(books)
        finally:
            conn.close()
