"""STRINGEXT

Small, stateless string helpers: delimited joins, CSV splitting, special
character stripping, page-name normalization, HTML encoding, and conversion
of plaintext into an obfuscated in-memory ``SecureString``.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
