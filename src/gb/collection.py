"""The loaded post set and the list operations on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gb.models import Post, SkippedFolder


def link_posts(posts: list[Post]) -> None:
    """Point each post's prev/next at its neighbours in posts.

    Call once, on the final list. The first post keeps prev=None and the
    last keeps next=None.
    """
    last = len(posts) - 1
    for i, post in enumerate(posts):
        if i > 0:
            post.prev = posts[i - 1]
        if i < last:
            post.next = posts[i + 1]


def reverse_posts(posts: list[Post]) -> None:
    """Reverse posts in place. prev/next are left alone: they stay chronological."""
    left, right = 0, len(posts) - 1
    while left < right:
        posts[left], posts[right] = posts[right], posts[left]
        left += 1
        right -= 1


@dataclass
class PostCollection:
    """Result of one load: posts in display order plus an id index.

    Both views share the same Post objects. newest_first tracks whether
    posts is currently reversed relative to folder order.
    """

    posts: list[Post] = field(default_factory=list)
    by_id: dict[int, Post] = field(default_factory=dict)
    skipped: list[SkippedFolder] = field(default_factory=list)
    newest_first: bool = False

    def __len__(self) -> int:
        return len(self.posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    def __contains__(self, post_id: object) -> bool:
        return post_id in self.by_id

    def get(self, post_id: int) -> Post | None:
        return self.by_id.get(post_id)

    @property
    def ids(self) -> list[int]:
        """Post ids in display order."""
        return [p.id for p in self.posts]

    def reverse(self) -> None:
        """Flip display order; links keep pointing chronologically."""
        reverse_posts(self.posts)
        self.newest_first = not self.newest_first
