"""
Modules Package

Business logic for the LLC tax comparator.

Modules:
- tax: Income tax calculators and jurisdiction comparison
- pricing: LLC formation and maintenance price catalogue

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax', 'pricing']
