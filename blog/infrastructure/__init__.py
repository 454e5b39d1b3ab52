"""Infrastructure layer: database connection and repositories."""
