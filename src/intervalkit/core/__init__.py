"""
Core Module - Foundational Components

Provides:
- Canonical JSON serialization
- Strict-JSON encoding of non-finite floats
"""

from .canonical_json import canonical_dumps, canonical_hash, encode_float, decode_float, to_canonical

__all__ = [
    'canonical_dumps',
    'canonical_hash',
    'encode_float',
    'decode_float',
    'to_canonical',
]
