"""
Composite body frame: cached assembly of the whole vehicle.

A canopy system is built from canopy cells, brake flaps, pilot, lines and
pilot chute, each with its own aero and mass segments. The frame is a
snapshot rebuilt only when deploy fraction, pilot pitch or a component
changes, and reused across integration steps.
"""

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np
from archimedes import struct

# Handle imports
try:
    from .apparent_mass import (
        CanopyGeometry, ApparentMassResult, canopy_geometry_from_polar,
        apparent_mass_at_deploy, compute_apparent_mass_result,
        effective_mass, effective_inertia,
    )
    from .aero import refresh_segments
    from .inertia import InertiaComponents, compute_center_of_mass, compute_inertia
    from .polar import Polar, MassSegment, SegmentControls
    from .segments import AeroSegment
    from .state import SimConfig
except ImportError:
    from apparent_mass import (
        CanopyGeometry, ApparentMassResult, canopy_geometry_from_polar,
        apparent_mass_at_deploy, compute_apparent_mass_result,
        effective_mass, effective_inertia,
    )
    from aero import refresh_segments
    from inertia import InertiaComponents, compute_center_of_mass, compute_inertia
    from polar import Polar, MassSegment, SegmentControls
    from segments import AeroSegment
    from state import SimConfig

logger = logging.getLogger(__name__)

DEPLOY_TOLERANCE = 0.001
PITCH_TOLERANCE_DEG = 0.01


@struct(frozen=True)
class CompositeFrameConfig:
    """
    Assembly recipe for a composite frame.

    Attributes
    ----------
    polar : Polar
        Reference canopy polar (mass, area, chord)
    make_aero_segments : Callable[[], list]
        Builds the aero segment list
    rotate_pilot_mass : Callable
        rotate_pilot_mass(pitch_deg, pivot, deploy) -> (weight, inertia)
    height : float
        Reference length for de-normalization (m)
    rho : float
        Air density used for apparent mass (kg/m^3)
    pivot : tuple, optional
        (x, z) override for the pilot rotation pivot
    """

    polar: Polar
    make_aero_segments: Callable
    rotate_pilot_mass: Callable
    height: float = 1.875
    rho: float = 1.225
    pivot: Optional[Tuple[float, float]] = None


@struct(frozen=True)
class CompositeFrame:
    """Cached snapshot of the assembled vehicle."""

    aero_segments: List[AeroSegment]
    weight_segments: List[MassSegment]
    inertia_segments: List[MassSegment]

    cg: np.ndarray                      # m, body NED
    inertia: InertiaComponents          # physical, kg*m^2
    total_mass: float                   # kg

    canopy_geometry: CanopyGeometry
    apparent_mass: ApparentMassResult
    effective_mass: np.ndarray          # per axis, kg
    effective_inertia: InertiaComponents

    height: float
    rho: float
    deploy: float
    pilot_pitch: float                  # deg


def build_composite_frame(frame_config: CompositeFrameConfig, deploy: float = 1.0,
                          pilot_pitch: float = 0.0) -> CompositeFrame:
    """
    Assemble segments, mass properties and apparent mass.

    Parameters:
    -----------
    frame_config : CompositeFrameConfig
        Assembly recipe
    deploy : float
        Canopy deployment fraction, 0 (packed) to 1 (inflated)
    pilot_pitch : float
        Pilot pitch about the riser pivot (deg), 0 = hanging vertical

    Returns:
    --------
    frame : CompositeFrame
    """
    polar = frame_config.polar
    height = frame_config.height
    rho = frame_config.rho

    aero_segments = list(frame_config.make_aero_segments())
    weight_segments, inertia_segments = frame_config.rotate_pilot_mass(
        pilot_pitch, frame_config.pivot, deploy)

    cg = compute_center_of_mass(weight_segments, height, polar.m)
    inertia = compute_inertia(inertia_segments, height, polar.m)

    full_geom = canopy_geometry_from_polar(polar.s, polar.chord)
    if deploy < 0.999:
        apparent = apparent_mass_at_deploy(full_geom, deploy, rho)
    else:
        apparent = compute_apparent_mass_result(full_geom, rho)

    frame = CompositeFrame(
        aero_segments=aero_segments,
        weight_segments=list(weight_segments),
        inertia_segments=list(inertia_segments),
        cg=cg,
        inertia=inertia,
        total_mass=polar.m,
        canopy_geometry=full_geom,
        apparent_mass=apparent,
        effective_mass=effective_mass(polar.m, apparent.mass),
        effective_inertia=effective_inertia(inertia, apparent.inertia),
        height=height,
        rho=rho,
        deploy=deploy,
        pilot_pitch=pilot_pitch,
    )
    logger.info(f"Built composite frame for {polar.name}: deploy={deploy:.3f}, "
                f"pilot_pitch={pilot_pitch:.2f} deg, {len(aero_segments)} aero segments")
    logger.debug(f"CG = {cg}, Iyy = {inertia.Iyy:.2f} kg*m^2, "
                 f"effective mass = {frame.effective_mass}")
    return frame


def frame_needs_rebuild(frame: CompositeFrame, deploy: float, pilot_pitch: float,
                        deploy_tol: float = DEPLOY_TOLERANCE,
                        pitch_tol: float = PITCH_TOLERANCE_DEG) -> bool:
    """True when deploy or pilot pitch moved beyond tolerance."""
    return (abs(frame.deploy - deploy) > deploy_tol
            or abs(frame.pilot_pitch - pilot_pitch) > pitch_tol)


def frame_to_sim_config(frame: CompositeFrame, controls: SegmentControls,
                        use_apparent_mass: bool = True) -> SimConfig:
    """
    Per-step configuration from a cached frame.

    Segments are refreshed once against the controls so their geometry
    (areas, positions) matches the live inputs. With apparent mass the
    effective inertia and per-axis mass are used; otherwise physical only.
    """
    return SimConfig(
        segments=refresh_segments(frame.aero_segments, controls),
        controls=controls,
        cg=frame.cg,
        inertia=frame.effective_inertia if use_apparent_mass else frame.inertia,
        mass=frame.total_mass,
        height=frame.height,
        rho=frame.rho,
        mass_per_axis=frame.effective_mass if use_apparent_mass else None,
    )
