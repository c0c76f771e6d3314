"""Textual option editor HTTP API."""
