"""
EasyCal: date, schedule and statistics utilities for a barber shop booking app
"""

__version__ = "1.0.0"
