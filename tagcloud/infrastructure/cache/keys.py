"""Cache key builders. Single place for key format (DRY).

Clouds are keyed tagcloud_<category>. Categories are host slugs and are
used verbatim; they must be non-empty.
"""

from tagcloud.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_TAGCLOUD
from tagcloud.domain.exceptions import ValidationException


def tagcloud_key(category: str) -> str:
    """Cache key for the cloud of a content category.

    Raises:
        ValidationException: If category is empty.
    """
    if not category:
        raise ValidationException("Category is required for cache key", field="category")
    return f"{CACHE_PREFIX_TAGCLOUD}{CACHE_KEY_SEP}{category}"
