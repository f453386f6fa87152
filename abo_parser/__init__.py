"""
abo-parser: ABO bank statement parser.

A library and CLI tool for reading ABO files, the fixed-width bank statement
format used by Czech and Slovak banks. Decodes account statements (074) and
transactions (075) in both the basic and the extended layout.

Usage:
    from abo_parser.core.parser import parse_file
    document = parse_file("statement.abo")
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
