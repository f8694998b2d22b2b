"""GBConfig: project-local config for a folder-per-post blog.

Default layout (all relative to the project root):

    gb.toml               # project config
    posts/
        001-hello/
            meta.json     # {"title": ..., "visible": true, "path": "hello.md", "id": 1}
            hello.md      # body
        002-next/
            ...

gb.toml example:

    [gb]
    name = "my-blog"
    # posts_dir = "posts"            # default
    # meta_filename = "meta.json"    # default
    # newest_first = true            # default
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_CONFIG_FILENAME = "gb.toml"
_DEFAULT_POSTS_DIR = "posts"
DEFAULT_META_FILENAME = "meta.json"


@dataclass
class GBConfig:
    """Resolved configuration for a blog project."""

    root: Path                      # directory that contains gb.toml
    name: str = ""
    posts_dir: Path = field(default_factory=Path)
    meta_filename: str = DEFAULT_META_FILENAME
    newest_first: bool = True

    def ensure_dirs(self) -> None:
        """Create posts_dir if it doesn't exist."""
        self.posts_dir.mkdir(parents=True, exist_ok=True)


def load_config(root: Path | str | None = None) -> GBConfig:
    """Load gb.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)

    gb_section = raw.get("gb", {})
    posts_rel = gb_section.get("posts_dir", _DEFAULT_POSTS_DIR)
    meta_filename = str(gb_section.get("meta_filename", DEFAULT_META_FILENAME))
    if not meta_filename:
        msg = f"meta_filename must not be empty ({config_path})"
        raise ValueError(msg)

    return GBConfig(
        root=root_path,
        name=gb_section.get("name", root_path.name),
        posts_dir=root_path / posts_rel,
        meta_filename=meta_filename,
        newest_first=bool(gb_section.get("newest_first", True)),
    )


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for gb.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start


def init_config(root: Path, name: str | None = None) -> Path:
    """Write a default gb.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"gb.toml already exists at {config_path}"
        raise FileExistsError(msg)

    project_name = name or root.name
    content = f"""\
[gb]
name = "{project_name}"
# posts_dir = "posts"            # one sub-folder per post
# meta_filename = "meta.json"    # descriptor file inside each post folder
# newest_first = true            # list posts newest first
"""
    config_path.write_text(content)
    return config_path
