"""Paths of the rendered views."""

HOME_PATH = "/"


def topic_path(slug: str) -> str:
    """Path of a topic page."""
    return f"/topic/{slug}"


def post_path(slug: str, post_id: object) -> str:
    """Path of a post page inside its topic."""
    return f"/topic/{slug}/posts/{post_id}"
