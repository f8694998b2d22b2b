"""Folder-per-post blog store: one directory per post, loaded into a linked list.

Layout:
    posts/
        <folder>/
            meta.json    # {"title": ..., "visible": true, "path": "body.md", "id": 1}
            body.md      # post body, read verbatim

Folders load in name order. Posts are linked prev/next in that order
(oldest to newest) and indexed by id; PostCollection.reverse() flips the
display order without touching the links.
"""

from gb.collection import PostCollection, link_posts, reverse_posts
from gb.config import GBConfig, init_config, load_config
from gb.errors import (
    BodyNotFound,
    DuplicateId,
    MetaMissingField,
    MetaNotFound,
    MetaParseError,
    PostError,
    RootUnreadable,
)
from gb.models import Post, PostMeta, SkippedFolder
from gb.reader import list_post_folders, load_from_config, load_post, load_posts, read_meta

__all__ = [
    "BodyNotFound",
    "DuplicateId",
    "GBConfig",
    "MetaMissingField",
    "MetaNotFound",
    "MetaParseError",
    "Post",
    "PostCollection",
    "PostError",
    "PostMeta",
    "RootUnreadable",
    "SkippedFolder",
    "init_config",
    "link_posts",
    "list_post_folders",
    "load_config",
    "load_from_config",
    "load_post",
    "load_posts",
    "read_meta",
    "reverse_posts",
]
