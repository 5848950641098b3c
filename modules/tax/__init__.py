"""
Tax Module

Pure, deterministic income tax calculations.

Features:
- Progressive bracket engine with flat social-security and VAT levies
- Registry of jurisdiction calculators (ES, US)
- Side-by-side comparison and savings figures

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['models', 'calculators', 'comparison']
