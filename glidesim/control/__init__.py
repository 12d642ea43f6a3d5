"""
Glide trim solver.
"""

from .trim import GlideTrimSolver

__all__ = ['GlideTrimSolver']
