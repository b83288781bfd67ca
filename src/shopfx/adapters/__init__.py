# src/shopfx/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate source APIs)
- Formatting (display strings)
"""

__all__ = []
