import uuid

from slugify import slugify


def generate_slug(title: str) -> str:
    """
    Generate a URL-friendly slug from a title using python-slugify.

    Falls back to a random "recipe-xxxxxxxx" slug when nothing is left.
    """
    slug = slugify(title)
    if not slug:
        slug = f"recipe-{uuid.uuid4().hex[:8]}"
    return slug


def format_duration(minutes: int) -> str:
    """90 -> '1h 30m', 45 -> '45m', 120 -> '2h'"""
    if minutes < 60:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"
