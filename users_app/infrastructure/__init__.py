"""Infrastructure layer: HTTP access, wire decoding and repository implementations."""
