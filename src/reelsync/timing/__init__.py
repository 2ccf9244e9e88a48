"""
Timing utilities
"""

from .time_format import format_time, format_readout

__all__ = [
    'format_time',
    'format_readout',
]
