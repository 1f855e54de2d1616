"""Blog commands: create, like, delete, list and show.

Listings are ranked most liked first; blogs with equal likes keep their
publication order.
"""

import click
import click_extra as clickx

from bloglist.domain import notices
from bloglist.domain.model import Blog
from bloglist.service_layer import commands, views

from .helpers import get_app, handle_errors, notify, success
from .options import optional_token_option, token_option


def _format_blog(blog: Blog) -> str:
    return f'"{blog.title}" by {blog.author}  <{blog.url}>  likes: {blog.likes}'


@click.group(cls=clickx.ExtraGroup)
def blogs() -> None:
    """Publish, like, delete and list blogs."""


@blogs.command()
@token_option
@click.option("--title", required=True, help="Blog title.")
@click.option("--author", default="", help="Author shown with the blog.")
@click.option("--url", required=True, help="Link to the blog.")
def create(token: str, title: str, author: str, url: str) -> None:
    """Publish a blog and print its id."""
    app = get_app()
    with handle_errors():
        blog = app.message_bus.handle(
            commands.CreateBlog(token=token, title=title, author=author, url=url)
        )
    notify(notices.blog_added(blog.title, blog.author))
    click.echo(blog.blog_id)


@blogs.command()
@click.argument("blog_id")
def like(blog_id: str) -> None:
    """Like a blog and print its new like count."""
    app = get_app()
    with handle_errors():
        likes = app.message_bus.handle(commands.LikeBlog(blog_id=blog_id))
    success(f"Liked {blog_id}")
    click.echo(likes)


@blogs.command()
@token_option
@click.argument("blog_id")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
def delete(token: str, blog_id: str, assume_yes: bool) -> None:
    """Delete a blog you published."""
    app = get_app()
    with handle_errors():
        blog = views.deletable_blog(app.uow, token, blog_id, clock=app.clock)
        if not assume_yes:
            click.confirm(f"Remove blog {blog.title} by {blog.author}?", abort=True)
        app.message_bus.handle(commands.DeleteBlog(token=token, blog_id=blog_id))
    notify(notices.blog_removed())


@blogs.command(name="list")
@optional_token_option
def list_blogs(token: str | None) -> None:
    """List blogs, most liked first.

    With a session token, blogs the caller may delete are marked with "*".
    """
    app = get_app()
    with handle_errors():
        listing = views.blog_listing(app.uow, token, clock=app.clock)
    for entry in listing:
        marker = "*" if entry.deletable else " "
        click.echo(f"{marker} {entry.blog.blog_id}  {_format_blog(entry.blog)}")


@blogs.command()
@click.argument("blog_id")
def show(blog_id: str) -> None:
    """Show one blog."""
    app = get_app()
    with handle_errors():
        blog = views.get_blog(app.uow, blog_id)
    click.echo(_format_blog(blog))
