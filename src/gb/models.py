"""Data models for the post store."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PostMeta:
    """A parsed meta.json; path is already joined to the post folder."""

    title: str
    visible: bool
    path: Path
    id: int


@dataclass(eq=False)
class Post:
    """A loaded post.

    Equality is identity. prev/next point at the chronological neighbours
    and are set once by link_posts; they stay out of repr since they form
    a cycle.
    """

    title: str
    id: int
    body: str
    visible: bool = True
    prev: Post | None = field(default=None, repr=False)
    next: Post | None = field(default=None, repr=False)

    @classmethod
    def from_meta(cls, meta: PostMeta, body: str) -> Post:
        return cls(title=meta.title, id=meta.id, body=body, visible=meta.visible)

    @property
    def prev_id(self) -> int | None:
        return self.prev.id if self.prev is not None else None

    @property
    def next_id(self) -> int | None:
        return self.next.id if self.next is not None else None


@dataclass(frozen=True)
class SkippedFolder:
    """A post folder left out of a load, and why."""

    folder: Path
    reason: str
