"""Ambient configuration and logging for kong-admin-client."""
