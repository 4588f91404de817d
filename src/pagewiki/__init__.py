"""PageWiki: a minimal file-backed page editor."""
