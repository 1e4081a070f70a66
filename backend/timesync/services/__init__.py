"""Stateful services used by the HTTP layer."""
