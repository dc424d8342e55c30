"""Stage modules. Each one registers itself on import."""
