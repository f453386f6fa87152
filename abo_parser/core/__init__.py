"""
abo-parser core library.

This package contains the core functionality:
- parser: ABO document decoding
"""

__all__: list[str] = []
