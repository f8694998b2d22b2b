"""gb CLI — browse a folder-per-post blog.

Commands:
    gb init [NAME]             create gb.toml + posts/ dir
    gb list                    list loaded posts in display order
    gb show ID                 print one post with its neighbours
    gb check                   report post folders that failed to load
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from gb.collection import PostCollection
from gb.config import GBConfig, init_config, load_config
from gb.errors import PostError
from gb.models import Post
from gb.reader import load_from_config

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg(root: str | None, posts_dir: str | None) -> GBConfig:
    try:
        cfg = load_config(root)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    if posts_dir:
        cfg.posts_dir = Path(posts_dir).resolve()
    return cfg


def _load_posts(cfg: GBConfig) -> PostCollection:
    try:
        return load_from_config(cfg)
    except PostError as exc:
        raise click.ClickException(str(exc)) from exc


def _fmt_id(post: Post | None) -> str:
    return "-" if post is None else str(post.id)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="gb")
@click.option("--dir", "root", default=None, help="Project root (default: search upward for gb.toml)")
@click.option("--posts-dir", default=None, help="Override the posts directory")
@click.option("-v", "--verbose", is_flag=True, help="Log each folder as it is loaded or skipped")
@click.pass_context
def cli(ctx: click.Context, root: str | None, posts_dir: str | None, verbose: bool) -> None:
    """gb — folder-per-post blog loader."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["root"] = root
    ctx.obj["posts_dir"] = posts_dir


# ---------------------------------------------------------------------------
# gb init
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def init(ctx: click.Context, name: str | None) -> None:
    """Create gb.toml and the posts directory in the current project."""
    root_path = Path(ctx.obj["root"] or ".").resolve()
    try:
        config_path = init_config(root_path, name=name)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo("gb.toml already exists — skipping init")

    cfg = _load_cfg(str(root_path), ctx.obj["posts_dir"])
    cfg.ensure_dirs()
    click.echo(f"Posts dir : {cfg.posts_dir}")


# ---------------------------------------------------------------------------
# gb list
# ---------------------------------------------------------------------------


@cli.command("list")
@click.option(
    "--newest-first/--oldest-first",
    default=None,
    help="Display order (default: newest_first from gb.toml)",
)
@click.pass_context
def list_posts(ctx: click.Context, newest_first: bool | None) -> None:
    """List loaded posts: id, title, previous and next ids."""
    cfg = _load_cfg(ctx.obj["root"], ctx.obj["posts_dir"])
    if newest_first is not None:
        cfg.newest_first = newest_first
    collection = _load_posts(cfg)

    if not collection:
        click.echo(f"No posts in {cfg.posts_dir}")
        return
    for post in collection:
        click.echo(f"{post.id:>5}  {post.title}  (prev {_fmt_id(post.prev)}, next {_fmt_id(post.next)})")
    if collection.skipped:
        click.echo(f"\n{len(collection.skipped)} folder(s) skipped — run `gb check` for details")


# ---------------------------------------------------------------------------
# gb show
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("post_id", type=int)
@click.pass_context
def show(ctx: click.Context, post_id: int) -> None:
    """Print a post's title and body, with links to its neighbours."""
    cfg = _load_cfg(ctx.obj["root"], ctx.obj["posts_dir"])
    collection = _load_posts(cfg)
    post = collection.get(post_id)
    if post is None:
        raise click.ClickException(f"Post not found: {post_id}")

    click.echo(f"# {post.title}  [{post.id}]")
    click.echo()
    # bytes go straight to the binary stream, so non-UTF-8 bodies print as-is
    click.echo(post.body.encode("utf-8", errors="surrogateescape"), nl=not post.body.endswith("\n"))
    click.echo()
    if post.prev is not None:
        click.echo(f"← {post.prev.id}: {post.prev.title}")
    if post.next is not None:
        click.echo(f"→ {post.next.id}: {post.next.title}")


# ---------------------------------------------------------------------------
# gb check
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Report post folders that were skipped. Exits 1 if any were."""
    cfg = _load_cfg(ctx.obj["root"], ctx.obj["posts_dir"])
    collection = _load_posts(cfg)

    click.echo(f"{len(collection)} posts loaded from {cfg.posts_dir}")
    for skip in collection.skipped:
        click.echo(f"  skipped {skip.folder.name}: {skip.reason}")
    if collection.skipped:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
