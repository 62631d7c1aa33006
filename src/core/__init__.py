"""
Core domain models, mathematical primitives, and invariants.

This module contains the numeric value types and the arithmetic contract
they share, independent of the demonstration driver.
"""
