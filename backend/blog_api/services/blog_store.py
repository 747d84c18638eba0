"""
Blog API Backend - In-Memory Blog Store
========================================

What:  The ordered, indexable collection of Blog records; the service's only
       mutable state.
How:   A Python list guarded by a lock. A blog's id is its current index.
Who:   Created once per application by create_app() and stored on
       app.state.store; route handlers reach it through get_store().
When:  Lives for the lifetime of the process (no persistence).

Positional Identity:
    ids are list indices, so they stay contiguous:
        [A, B, C]  delete(1)  →  [A, C]   (C moves from id 2 to id 1)

Delete Bounds:
    strict  → reject id < 0 or id >= len   (same as get/update)
    legacy  → reject id <= 0 or id > len   (reference behavior; id == len
              passes the check and then faults on removal)
"""

import logging
import threading
from typing import List, Optional, Sequence, Tuple

from blog_api.exceptions import BlogNotFoundError
from blog_api.schemas.blog import Blog

logger = logging.getLogger(__name__)

SEED_BLOGS: Tuple[Blog, ...] = (
    Blog(title="First", body="Blog 1"),
    Blog(title="Second", body="Blog 2"),
)

DELETE_BOUNDS_MODES = ("strict", "legacy")


class BlogStore:
    """
    Thread-safe list of blogs addressed by position.

    Every public method takes the lock for its whole duration, so a reader
    never observes a half-applied create, update or delete.
    """

    def __init__(
        self,
        blogs: Optional[Sequence[Blog]] = None,
        delete_bounds: str = "strict",
    ):
        if delete_bounds not in DELETE_BOUNDS_MODES:
            raise ValueError(
                f"Invalid delete_bounds '{delete_bounds}'. Must be one of: {DELETE_BOUNDS_MODES}"
            )
        self._blogs: List[Blog] = list(blogs or [])
        self._lock = threading.Lock()
        self.delete_bounds = delete_bounds

    def __len__(self) -> int:
        with self._lock:
            return len(self._blogs)

    def list_all(self) -> List[Blog]:
        """Return a snapshot of every blog in current order."""
        with self._lock:
            return list(self._blogs)

    def get(self, blog_id: int) -> Blog:
        with self._lock:
            self._check_bounds(blog_id)
            return self._blogs[blog_id]

    def create(self, blog: Blog) -> Tuple[int, Blog]:
        """
        Append a blog and return (new_id, blog).

        new_id is len(store) - 1 immediately after the append.
        """
        with self._lock:
            self._blogs.append(blog)
            blog_id = len(self._blogs) - 1
        logger.debug("Blog created at index %d", blog_id)
        return blog_id, blog

    def update(self, blog_id: int, blog: Blog) -> Blog:
        with self._lock:
            self._check_bounds(blog_id)
            self._blogs[blog_id] = blog
        logger.debug("Blog %d replaced", blog_id)
        return blog

    def delete(self, blog_id: int) -> None:
        """
        Remove the blog at blog_id, shifting later blogs down by one.

        Raises:
            BlogNotFoundError: blog_id rejected by the configured bounds rule
            IndexError: legacy mode only, when blog_id == len(store)
        """
        with self._lock:
            size = len(self._blogs)
            if self.delete_bounds == "legacy":
                if blog_id <= 0 or blog_id > size:
                    raise BlogNotFoundError(blog_id=blog_id, size=size)
            else:
                self._check_bounds(blog_id)
            del self._blogs[blog_id]
        logger.debug("Blog %d deleted", blog_id)

    def _check_bounds(self, blog_id: int) -> None:
        # Caller holds the lock
        size = len(self._blogs)
        if blog_id < 0 or blog_id >= size:
            raise BlogNotFoundError(blog_id=blog_id, size=size)


def build_store(seed: bool = True, delete_bounds: str = "strict") -> BlogStore:
    """Create a store, optionally pre-loaded with the reference seed records."""
    return BlogStore(
        blogs=SEED_BLOGS if seed else None,
        delete_bounds=delete_bounds,
    )
