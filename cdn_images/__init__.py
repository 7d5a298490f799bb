import logging

from .filters import build_image_link, image_filter

logger = logging.getLogger(__name__)

__all__ = ['build_image_link', 'image_filter', 'jinja_filters']


def jinja_filters(base_url):
    """Filter mapping for the ``JINJA_FILTERS`` setting."""
    if not isinstance(base_url, str) or not base_url:
        raise ValueError(f"CDN base URL must be a non-empty string, got {base_url!r}")

    logger.debug("Binding image_from_cdn to %s", base_url)
    return {
        'image_from_cdn': image_filter(base_url),
    }
