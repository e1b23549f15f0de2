"""
Test suite for the bonding curve engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
