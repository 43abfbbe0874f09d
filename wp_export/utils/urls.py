from __future__ import annotations

import re
from typing import Optional
from urllib.parse import unquote, urljoin, urlparse

from .errors import ImageResolutionError

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def is_absolute_url(url: Optional[str]) -> bool:
    """Return ``True`` when ``url`` starts with ``http://`` or ``https://``."""
    return bool(url) and bool(_ABSOLUTE_URL.match(url))


def resolve_image_url(image_url: str, post_link: Optional[str]) -> str:
    """
    Turn an image reference scraped from post markup into an absolute URL.

    Absolute references are returned unchanged.  Relative references are
    joined to the link of the post they were found in, which must itself be
    absolute.

    Raises:
        ImageResolutionError: If ``image_url`` is relative and ``post_link``
            is not an absolute URL.
    """
    if is_absolute_url(image_url):
        return image_url
    if is_absolute_url(post_link):
        return urljoin(post_link, image_url)
    raise ImageResolutionError(image_url, post_link)


def get_filename_from_url(url: str) -> str:
    """Last path segment of ``url``, percent-decoded, without query or fragment."""
    path = urlparse(url).path
    filename = path.split("/")[-1]
    return unquote(filename)
