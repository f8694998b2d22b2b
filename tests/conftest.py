from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def posts_dir() -> Path:
    return TESTDATA / "testposts"


@pytest.fixture
def make_post(tmp_path: Path):
    """Write <tmp_path>/posts/<folder>/meta.json (+ body) and return the folder."""

    def _make(
        folder: str,
        meta: dict[str, Any] | str | None = None,
        body: str | bytes | None = "body\n",
        body_name: str = "body.md",
        meta_filename: str = "meta.json",
    ) -> Path:
        d = tmp_path / "posts" / folder
        d.mkdir(parents=True, exist_ok=True)
        if meta is not None:
            text = meta if isinstance(meta, str) else json.dumps(meta)
            (d / meta_filename).write_text(text)
        if body is not None:
            data = body if isinstance(body, bytes) else body.encode()
            (d / body_name).write_bytes(data)
        return d

    return _make


def meta_for(post_id: int, title: str | None = None, visible: bool = True, path: str = "body.md") -> dict[str, Any]:
    return {"title": title or f"post {post_id}", "visible": visible, "path": path, "id": post_id}
