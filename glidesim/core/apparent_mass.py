"""
Apparent (added) mass of a thin canopy planform.

Air accelerated along with the canopy adds virtual mass per axis and
virtual rotational inertia. Flat-plate potential-flow estimates:

- normal (z): disc of diameter chord, length span
- spanwise (y): disc of diameter span, length chord
- chordwise (x): 10% thickness section

Rotational terms are strip-theory second moments of the per-axis added
mass. Cross terms are neglected (symmetric planform). Everything scales
with air density.
"""

import numpy as np
from archimedes import struct

# Handle imports
try:
    from .inertia import InertiaComponents
except ImportError:
    from inertia import InertiaComponents

PI_4 = np.pi / 4.0
THICKNESS_RATIO = 0.10


@struct(frozen=True)
class CanopyGeometry:
    span: float   # m
    chord: float  # m
    area: float   # m^2


@struct(frozen=True)
class ApparentMass:
    """Added mass per body axis (kg)."""

    x: float
    y: float
    z: float

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])


@struct(frozen=True)
class ApparentInertia:
    """Added rotational inertia (kg*m^2), diagonal only."""

    Ixx: float
    Iyy: float
    Izz: float


@struct(frozen=True)
class ApparentMassResult:
    mass: ApparentMass
    inertia: ApparentInertia


def canopy_geometry_from_polar(area: float, chord: float) -> CanopyGeometry:
    """Rectangular planform with span = area / chord."""
    return CanopyGeometry(span=area / chord, chord=chord, area=area)


def compute_apparent_mass(geom: CanopyGeometry, rho: float = 1.225) -> ApparentMass:
    """Per-axis added mass of a flat planform."""
    b, c = geom.span, geom.chord
    t = THICKNESS_RATIO * c
    return ApparentMass(
        x=PI_4 * rho * t * t * b,
        y=PI_4 * rho * b * b * c,
        z=PI_4 * rho * c * c * b,
    )


def compute_apparent_inertia(geom: CanopyGeometry, rho: float = 1.225) -> ApparentInertia:
    """
    Added rotational inertia from strip theory.

    Roll integrates the normal added mass per unit span over y^2, pitch
    integrates strips across the chord over x^2, and yaw uses the
    thickness-based in-plane added mass.
    """
    b, c = geom.span, geom.chord
    t = THICKNESS_RATIO * c
    return ApparentInertia(
        Ixx=PI_4 * rho * c * c * b ** 3 / 12.0,
        Iyy=PI_4 * rho * b * c ** 3 / 12.0,
        Izz=PI_4 * rho * t * t * b ** 3 / 12.0,
    )


def compute_apparent_mass_result(geom: CanopyGeometry, rho: float = 1.225) -> ApparentMassResult:
    return ApparentMassResult(mass=compute_apparent_mass(geom, rho),
                              inertia=compute_apparent_inertia(geom, rho))


def apparent_mass_at_deploy(full_geom: CanopyGeometry, deploy: float,
                            rho: float = 1.225) -> ApparentMassResult:
    """
    Apparent mass of a partially inflated canopy.

    Span scales as 0.1 + 0.9 d and chord as 0.2 + 0.8 d with d clamped to
    [0, 1], so the packed canopy keeps a small residual.
    """
    d = max(0.0, min(1.0, deploy))
    span = full_geom.span * (0.1 + 0.9 * d)
    chord = full_geom.chord * (0.2 + 0.8 * d)
    return compute_apparent_mass_result(CanopyGeometry(span=span, chord=chord, area=span * chord), rho)


def effective_mass(physical_mass: float, apparent: ApparentMass) -> np.ndarray:
    """Per-axis effective mass (x, y, z) = physical + apparent."""
    return np.array([physical_mass + apparent.x,
                     physical_mass + apparent.y,
                     physical_mass + apparent.z])


def effective_inertia(physical: InertiaComponents, apparent: ApparentInertia) -> InertiaComponents:
    """Physical inertia plus apparent diagonal; products unchanged."""
    return InertiaComponents(
        Ixx=physical.Ixx + apparent.Ixx,
        Iyy=physical.Iyy + apparent.Iyy,
        Izz=physical.Izz + apparent.Izz,
        Ixy=physical.Ixy,
        Ixz=physical.Ixz,
        Iyz=physical.Iyz,
    )


if __name__ == "__main__":
    geom = canopy_geometry_from_polar(20.439, 2.5)
    print("=== Ibex UL apparent mass ===")
    print(f"  Span: {geom.span:.3f} m  Chord: {geom.chord:.3f} m")
    for deploy in (0.0, 0.25, 0.5, 1.0):
        result = apparent_mass_at_deploy(geom, deploy)
        m, I = result.mass, result.inertia
        print(f"  deploy={deploy:4.2f}  m_a=({m.x:6.2f}, {m.y:6.2f}, {m.z:6.2f}) kg  "
              f"I_a=({I.Ixx:7.2f}, {I.Iyy:6.2f}, {I.Izz:6.2f}) kg*m^2")
