"""Errors raised while loading posts.

Per-folder errors (everything except RootUnreadable) are absorbed by
load_posts: the folder is skipped and loading moves on.
"""

from __future__ import annotations


class PostError(Exception):
    """Base class for all post loading errors."""


class MetaNotFound(PostError):
    """The descriptor file is missing or unreadable."""


class MetaParseError(PostError):
    """The descriptor file is not a valid post descriptor."""


class MetaMissingField(PostError):
    """The descriptor does not name a body file."""


class BodyNotFound(PostError):
    """The body file referenced by a descriptor is missing or unreadable."""


class DuplicateId(PostError):
    """Another folder earlier in the scan already claimed this id."""


class RootUnreadable(PostError):
    """The posts directory itself cannot be listed."""
