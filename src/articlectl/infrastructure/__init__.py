"""Infrastructure layer: template loading and article file I/O."""
