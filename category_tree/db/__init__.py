"""
Database module - demo data for the SQLite store
"""
from .seed import seed_all

__all__ = ["seed_all"]
