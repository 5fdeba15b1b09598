"""Infrastructure layer: the HTTP transport."""
