"""Infrastructure layer - host boundary and registries."""
