"""
Test suite for constant-term-solver

Contains:
- tests/unit/          : Unit tests for arithmetic, parsing, points, solver, CLI
"""
