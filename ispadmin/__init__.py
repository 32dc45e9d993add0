"""
ISP admin lifecycle engine - domain and invoice status transitions
"""

__version__ = "1.0.0"
