"""Profile replacement and lookup."""
