"""
Core domain models, exact arithmetic primitives, and input contracts.

This module contains the building blocks that are independent of any
I/O: exact rational arithmetic, numeral parsing, value models, and the
typed error taxonomy.
"""
