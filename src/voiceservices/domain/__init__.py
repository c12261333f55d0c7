"""Domain layer - gateway configuration model, identity and errors."""
