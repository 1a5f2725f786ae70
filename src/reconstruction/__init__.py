"""
Reconstruction pipeline: document → points → Lagrange interpolation at zero.
"""

from src.reconstruction.interpolation import (
    basis_factor_at_zero,
    constant_term_at_zero,
    lagrange_term_at_zero,
)
from src.reconstruction.loader import load_document, parse_document
from src.reconstruction.points import (
    KEYS_PROPERTY,
    build_points,
    is_point_property,
    parse_sample,
    select_points,
)
from src.reconstruction.solver import (
    ConstantTermSolver,
    SolveResult,
    SolverConfig,
    build_document,
    parse_threshold,
    solve_constant_term,
)

__all__ = [
    # Interpolation
    "basis_factor_at_zero",
    "constant_term_at_zero",
    "lagrange_term_at_zero",
    # Loader
    "load_document",
    "parse_document",
    # Points
    "KEYS_PROPERTY",
    "build_points",
    "is_point_property",
    "parse_sample",
    "select_points",
    # Solver
    "ConstantTermSolver",
    "SolveResult",
    "SolverConfig",
    "build_document",
    "parse_threshold",
    "solve_constant_term",
]
