"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the matrix engine
that are independent of any caller or display layer.
"""
