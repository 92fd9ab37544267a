"""Application services for account registration, sign-in and profiles."""
