"""Credential verification and session token issuance."""
