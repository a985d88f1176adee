"""
Catalog package for the Middle-earth Books service.

This package contains:
- Typed decoding of the upstream book catalog payload
- The book projection service that calls the upstream API
- Domain errors raised while fetching books
- Title search used by the command line client
"""

__version__ = "1.0.0"
