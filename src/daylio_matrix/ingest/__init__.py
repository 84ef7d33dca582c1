"""
Loaders for diary exports.
"""

from .base import BaseExportLoader
from .daylio import DaylioExportLoader

__all__ = ['BaseExportLoader', 'DaylioExportLoader']
