"""Last-resort extraction from the page heading and meta tags."""

from typing import Optional

from bs4 import BeautifulSoup

from ..models import RawRecipe


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    meta = soup.find("meta", attrs=attrs)
    if meta is None:
        return None
    content = (meta.get("content") or "").strip()
    return content or None


def extract_from_heuristics(soup: BeautifulSoup) -> Optional[RawRecipe]:
    """
    Build a stub recipe (title, description, image) from the page itself.

    Never produces ingredients or instructions: the result is meant to be
    completed by hand.
    """
    h1 = soup.find("h1")
    title = (
        (h1.get_text().strip() if h1 else "")
        or _meta_content(soup, property="og:title")
        or (soup.title.get_text().strip() if soup.title else "")
    )
    if not title:
        return None

    return {
        "name": title,
        "description": (
            _meta_content(soup, name="description")
            or _meta_content(soup, property="og:description")
        ),
        "image": _meta_content(soup, property="og:image"),
    }
