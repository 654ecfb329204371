"""
Audio Services Module

Handles uploaded audio:
  - Request-scoped temp storage
"""

from .temp_storage import scoped_upload, remove_file

__all__ = [
    "scoped_upload",
    "remove_file",
]
