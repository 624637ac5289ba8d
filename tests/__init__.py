"""
Test suite for binrep

Contains:
- tests/unit/          : Unit tests for individual modules
"""
