"""Application ports: protocols implemented by infrastructure."""

from tagcloud.application.interfaces.repositories import ITagRepository

__all__ = ["ITagRepository"]
