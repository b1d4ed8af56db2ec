"""Infrastructure layer: configuration and database plumbing."""
