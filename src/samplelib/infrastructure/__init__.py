"""Infrastructure layer: concrete capability implementations and I/O."""
