"""Command-line interface module for ReliableTXT.

This module provides CLI tools to detect, inspect, decode, encode and convert
ReliableTXT files, and to benchmark the codec.
"""

from .main import main

__all__ = ["main"]
