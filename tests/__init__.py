"""
Test suite for exactprob

Contains:
- tests/unit/          : Unit tests for individual modules
"""
