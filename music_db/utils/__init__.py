"""Shared utilities: configuration, logging, database and response helpers."""
