"""
Core of digestkit.

This package provides:
- Algorithm, Digest and Verifier value types
- The digest text grammar
- Custom exception hierarchy
- ServiceContainer and bootstrap for the shared registry and logger
- Pydantic settings
"""
