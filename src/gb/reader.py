"""Load post folders from disk.

    posts = load_posts("/path/to/posts")
    posts.get(3).next.title

Each immediate sub-folder of the posts directory is one candidate post:

    <posts_dir>/
        001-hello/
            meta.json    # {"title": "hello", "visible": true, "path": "hello.md", "id": 1}
            hello.md

Folders are scanned in name order. A folder whose meta.json is missing,
malformed or lacks a path, whose body file can't be read, or whose id was
already taken by an earlier folder is skipped (logged and recorded in
PostCollection.skipped). Hidden posts (visible = false) are left out
without being counted as skipped. Only an unreadable posts directory is
fatal.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gb.collection import PostCollection, link_posts
from gb.config import DEFAULT_META_FILENAME
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

if TYPE_CHECKING:
    from gb.config import GBConfig

logger = logging.getLogger("gb.reader")

# meta.json field -> (expected JSON type, value when absent or null)
_META_FIELDS: dict[str, tuple[type, Any]] = {
    "title": (str, ""),
    "visible": (bool, False),
    "path": (str, ""),
    "id": (int, 0),
}


# ---------------------------------------------------------------------------
# meta.json
# ---------------------------------------------------------------------------


def _meta_field(obj: dict[str, Any], name: str, meta_path: Path) -> Any:
    kind, default = _META_FIELDS[name]
    value = obj.get(name)
    if value is None:
        return default
    # bool is an int subclass; "id": true is not an id
    ok = isinstance(value, kind) and not (kind is int and isinstance(value, bool))
    if not ok:
        msg = f"{meta_path}: {name!r} must be {kind.__name__}, got {type(value).__name__}"
        raise MetaParseError(msg)
    return value


def read_meta(folder: Path | str, *, meta_filename: str = DEFAULT_META_FILENAME) -> PostMeta:
    """Parse <folder>/<meta_filename> and resolve its body path against folder.

    Keys match case-insensitively; absent fields take their zero value.
    Raises MetaNotFound, MetaParseError or MetaMissingField.
    """
    folder = Path(folder)
    meta_path = folder / meta_filename
    try:
        raw = meta_path.read_bytes()
    except OSError as exc:
        raise MetaNotFound(f"{meta_path}: {exc.strerror or exc}") from exc

    try:
        obj = json.loads(raw)
    except ValueError as exc:
        raise MetaParseError(f"{meta_path}: {exc}") from exc
    if not isinstance(obj, dict):
        msg = f"{meta_path}: expected a JSON object, got {type(obj).__name__}"
        raise MetaParseError(msg)

    fields = {str(k).lower(): v for k, v in obj.items()}
    title = _meta_field(fields, "title", meta_path)
    visible = _meta_field(fields, "visible", meta_path)
    rel_path = _meta_field(fields, "path", meta_path)
    post_id = _meta_field(fields, "id", meta_path)

    if rel_path == "":
        logger.debug("no body path in %s", meta_path)
        msg = "path does not exist for this post"
        raise MetaMissingField(msg)

    # Always nested under the post folder, even if written as "/x.md"
    return PostMeta(
        title=title,
        visible=visible,
        path=folder / rel_path.lstrip("/"),
        id=post_id,
    )


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------


def load_post(meta: PostMeta) -> Post:
    """Read the body file named by meta. Raises BodyNotFound.

    The body is the file's bytes as-is: no newline translation, and bytes
    that aren't valid UTF-8 survive as surrogate escapes.
    """
    try:
        raw = meta.path.read_bytes()
    except OSError as exc:
        raise BodyNotFound(f"{meta.path}: {exc.strerror or exc}") from exc
    return Post.from_meta(meta, raw.decode("utf-8", errors="surrogateescape"))


# ---------------------------------------------------------------------------
# Posts directory
# ---------------------------------------------------------------------------


def list_post_folders(posts_dir: Path | str) -> list[Path]:
    """Immediate sub-folders of posts_dir in name order. Raises RootUnreadable.

    Symlinks are not followed, even when they point at a directory.
    """
    posts_dir = Path(posts_dir)
    try:
        entries = sorted(posts_dir.iterdir(), key=lambda p: p.name)
        return [p for p in entries if p.is_dir() and not p.is_symlink()]
    except OSError as exc:
        logger.error("cannot list posts directory %s: %s", posts_dir, exc)
        raise RootUnreadable(f"{posts_dir}: {exc.strerror or exc}") from exc


def load_posts(
    posts_dir: Path | str,
    *,
    meta_filename: str = DEFAULT_META_FILENAME,
) -> PostCollection:
    """Load every visible post under posts_dir, linked oldest to newest."""
    posts: list[Post] = []
    by_id: dict[int, Post] = {}
    skipped: list[SkippedFolder] = []

    for folder in list_post_folders(posts_dir):
        try:
            meta = read_meta(folder, meta_filename=meta_filename)
            if not meta.visible:
                logger.debug("hidden post: %s", folder.name)
                continue
            if meta.id in by_id:
                msg = f"id {meta.id} already used by {by_id[meta.id].title!r}"
                raise DuplicateId(msg)
            post = load_post(meta)
        except PostError as exc:
            logger.info("skipping %s: %s", folder.name, exc)
            skipped.append(SkippedFolder(folder=folder, reason=str(exc)))
            continue
        by_id[post.id] = post
        posts.append(post)

    link_posts(posts)
    logger.info("loaded %d posts from %s (%d skipped)", len(posts), posts_dir, len(skipped))
    return PostCollection(posts=posts, by_id=by_id, skipped=skipped)


def load_from_config(cfg: GBConfig) -> PostCollection:
    """load_posts using cfg's posts_dir and meta_filename, in cfg's display order."""
    collection = load_posts(cfg.posts_dir, meta_filename=cfg.meta_filename)
    if cfg.newest_first:
        collection.reverse()
    return collection
