"""Async database infrastructure.

This module provides async database connectivity using aiosqlite.
"""
from .connection import Database, database_path, parse_database_url, same_database

__all__ = [
    'Database',
    'database_path',
    'parse_database_url',
    'same_database',
]
