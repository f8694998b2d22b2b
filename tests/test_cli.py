from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from gb.cli import cli


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


def test_list_newest_first(posts_dir: Path, tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "--posts-dir", str(posts_dir), "list")
    assert result.exit_code == 0, result.output
    lines = [line.split()[0] for line in result.output.splitlines() if "(prev" in line]
    assert lines == ["6", "3", "1"]
    assert "3 folder(s) skipped" in result.output


def test_list_oldest_first(posts_dir: Path, tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "--posts-dir", str(posts_dir), "list", "--oldest-first")
    assert result.exit_code == 0, result.output
    assert "1  post 1  (prev -, next 3)" in result.output
    assert result.output.index("post 1") < result.output.index("post 6")


def test_list_empty(tmp_path: Path) -> None:
    (tmp_path / "posts").mkdir()
    result = _run("--dir", str(tmp_path), "list")
    assert result.exit_code == 0
    assert "No posts" in result.output


def test_list_missing_root(tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "list")
    assert result.exit_code == 1
    assert "posts" in result.output


def test_show(posts_dir: Path, tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "--posts-dir", str(posts_dir), "show", "3")
    assert result.exit_code == 0, result.output
    assert "# post 3  [3]" in result.output
    assert "Third post." in result.output
    assert "← 1: post 1" in result.output
    assert "→ 6: post 6" in result.output


def test_show_unknown(posts_dir: Path, tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "--posts-dir", str(posts_dir), "show", "2")
    assert result.exit_code == 1
    assert "Post not found: 2" in result.output


def test_check_reports_skips(posts_dir: Path, tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "--posts-dir", str(posts_dir), "check")
    assert result.exit_code == 1
    assert "3 posts loaded" in result.output
    assert "skipped 005-EmptyBodyPath: path does not exist for this post" in result.output
    assert "004-MissingBody" in result.output
    assert "006-MalformedMeta" in result.output


def test_check_clean(tmp_path: Path) -> None:
    post = tmp_path / "posts" / "001"
    post.mkdir(parents=True)
    (post / "meta.json").write_text('{"title": "t", "visible": true, "path": "b.md", "id": 1}')
    (post / "b.md").write_text("b")
    result = _run("--dir", str(tmp_path), "check")
    assert result.exit_code == 0, result.output
    assert "1 posts loaded" in result.output


def test_init(tmp_path: Path) -> None:
    result = _run("--dir", str(tmp_path), "init", "myblog")
    assert result.exit_code == 0, result.output
    assert (tmp_path / "gb.toml").exists()
    assert (tmp_path / "posts").is_dir()

    again = _run("--dir", str(tmp_path), "init")
    assert "already exists" in again.output


def test_show_non_utf8_body(tmp_path: Path) -> None:
    post = tmp_path / "posts" / "001"
    post.mkdir(parents=True)
    (post / "meta.json").write_text('{"title": "latin", "visible": true, "path": "b.md", "id": 1}')
    (post / "b.md").write_bytes(b"hello \xff world\n")
    result = _run("--dir", str(tmp_path), "show", "1")
    assert result.exit_code == 0, result.output
    assert b"hello \xff world\n" in result.stdout_bytes
