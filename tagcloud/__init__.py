"""Tag cloud service: ranked tag clouds for content categories."""
