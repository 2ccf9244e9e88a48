"""
Edit parameters: trim range and crop rectangle.
"""

from .parameter_store import EditParameterStore

__all__ = [
    'EditParameterStore',
]
