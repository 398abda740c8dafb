"""
Core errors, configuration, mathematical primitives and domain models.

This package is independent of the probability engine and the descriptive
statistics built on top of it.
"""
