"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any front end: unit table, measurement model, float safeguards
and data contracts.
"""
