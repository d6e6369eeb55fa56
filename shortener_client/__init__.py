"""
Client-side URL shortener.

Validates user input, calls a shortening service over HTTP and keeps a
bounded, persisted history of the results.
"""

__version__ = "1.0.0"
