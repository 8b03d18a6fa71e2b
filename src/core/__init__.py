"""
Core domain models, numeric primitives, and contracts.

This module contains the foundational building blocks of number description
that are independent of any output or printing layer.
"""
