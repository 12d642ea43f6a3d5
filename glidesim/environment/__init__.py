"""
Environment models for flight simulation.

This module provides the standard atmosphere.
"""

from .atmosphere import StandardAtmosphere, density_at

__all__ = ['StandardAtmosphere', 'density_at']
