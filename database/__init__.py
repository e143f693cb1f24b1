"""
Database module
Flat-file persistence for the registration roster
"""

from .db import FlatFileStore, get_store

__all__ = ['FlatFileStore', 'get_store']
