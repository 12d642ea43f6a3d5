"""
Point-mass aggregation: center of mass and inertia tensor.

Mass segments carry a mass ratio (fraction of the reference mass) and a
position normalized by the reference length. Inertia is taken about the
body origin, NED axes.
"""

from typing import Dict, List, Sequence

import numpy as np
from archimedes import struct

# Handle imports
try:
    from .polar import MassSegment
except ImportError:
    from polar import MassSegment


@struct(frozen=True)
class InertiaComponents:
    """
    Inertia tensor components (kg*m^2).

    Products of inertia use the tensor sign convention (Ixy = -sum m x y).
    """

    Ixx: float = 0.0
    Iyy: float = 0.0
    Izz: float = 0.0
    Ixy: float = 0.0
    Ixz: float = 0.0
    Iyz: float = 0.0

    def to_matrix(self) -> np.ndarray:
        """Full symmetric 3x3 inertia tensor."""
        return np.array([
            [self.Ixx, self.Ixy, self.Ixz],
            [self.Ixy, self.Iyy, self.Iyz],
            [self.Ixz, self.Iyz, self.Izz],
        ])


ZERO_INERTIA = InertiaComponents()


def calculate_inertia_components(masses: Sequence[float], positions) -> InertiaComponents:
    """
    Inertia of point masses about the origin.

    Parameters:
    -----------
    masses : sequence of float
        Point masses (kg)
    positions : array_like, shape (n, 3)
        Positions (m)

    Returns:
    --------
    inertia : InertiaComponents
    """
    if len(masses) == 0:
        return ZERO_INERTIA
    m = np.asarray(masses, dtype=float)
    p = np.asarray(positions, dtype=float).reshape(-1, 3)
    x, y, z = p[:, 0], p[:, 1], p[:, 2]
    return InertiaComponents(
        Ixx=float(np.sum(m * (y * y + z * z))),
        Iyy=float(np.sum(m * (x * x + z * z))),
        Izz=float(np.sum(m * (x * x + y * y))),
        Ixy=float(-np.sum(m * x * y)),
        Ixz=float(-np.sum(m * x * z)),
        Iyz=float(-np.sum(m * y * z)),
    )


def compute_inertia(segments: Sequence[MassSegment], height: float = 1.875,
                    weight: float = 77.5) -> InertiaComponents:
    """Inertia of mass segments scaled to meters and kilograms."""
    if len(segments) == 0:
        return ZERO_INERTIA
    masses = [seg.mass_ratio * weight for seg in segments]
    positions = [np.asarray(seg.position, dtype=float) * height for seg in segments]
    return calculate_inertia_components(masses, positions)


def compute_center_of_mass(segments: Sequence[MassSegment], height: float = 1.875,
                           weight: float = 77.5) -> np.ndarray:
    """
    Mass-weighted mean position (m).

    Returns the origin when the segments carry no mass.
    """
    total_mass = 0.0
    moment = np.zeros(3)
    for seg in segments:
        m = seg.mass_ratio * weight
        total_mass += m
        moment += m * np.asarray(seg.position, dtype=float) * height
    if total_mass == 0:
        return np.zeros(3)
    return moment / total_mass


def get_physical_mass_positions(segments: Sequence[MassSegment], height: float = 1.875,
                                weight: float = 77.5) -> List[Dict]:
    """Name, mass (kg) and position (m) of each segment."""
    result = []
    for seg in segments:
        x, y, z = (c * height for c in seg.position)
        result.append({'name': seg.name, 'mass': seg.mass_ratio * weight,
                       'x': x, 'y': y, 'z': z})
    return result
