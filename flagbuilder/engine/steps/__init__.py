"""Construction steps 1-22. Each module registers exactly one step on import."""
