"""Core constants: cache key format, rank scale and rendering defaults.

Single source of truth for cache key structure (DRY). Used by the cache
key builders and the cloud builder/renderer.
"""

# Cache key prefix and delimiter: tagcloud_<category>
CACHE_PREFIX_TAGCLOUD = "tagcloud"
CACHE_KEY_SEP = "_"

# Rank scale (inclusive)
RANK_MIN = 1
RANK_MAX = 5

# Taxonomy classification that marks a taxonomy as a tag taxonomy
TAGS_BEHAVIOUR = "tags"

# Rendering defaults
RANK_PLACEHOLDER = "{rank}"
DEFAULT_MARKER = "tag-{rank}"
