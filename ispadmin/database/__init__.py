"""Data models"""

from ispadmin.database.models import Invoice


__all__ = ["Invoice"]
