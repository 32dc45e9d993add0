"""Utilities and helper functions"""
from ispadmin.utils.helpers import as_utc, format_amount, get_now
from ispadmin.utils.sentry import init_sentry


__all__ = [
    "as_utc",
    "format_amount",
    "get_now",
    "init_sentry",
]
