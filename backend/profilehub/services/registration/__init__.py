"""Account registration use case."""
