"""Application services: credentials, session tokens and email verification."""
