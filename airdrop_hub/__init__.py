"""Airdrop Hub client state: credentials, session, rankings and events."""

__version__ = "0.1.0"
