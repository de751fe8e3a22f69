"""Runtime components for list retrieval."""
