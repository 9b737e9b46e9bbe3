"""Infrastructure: cache backends and persistence."""
