"""Blog Posts API."""
