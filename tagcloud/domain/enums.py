"""Domain enumerations for the tag cloud service."""

from enum import Enum


class ViewMode(str, Enum):
    """Rendering style of a tag cloud.

    LIST wraps links in <ul>/<li>; RAW emits bare space-separated links.
    """

    LIST = "list"
    RAW = "raw"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid view modes as strings.

        Returns:
            List of enum value strings (e.g. for validation or API docs).
        """
        return [mode.value for mode in cls]
