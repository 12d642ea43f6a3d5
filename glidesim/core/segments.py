"""
Aerodynamic segments: one force-producing surface or body each.

An AeroSegment is an immutable descriptor tagged by ``kind``. Evaluating a
segment at a flow condition returns an updated descriptor (area, chord,
position and roll follow deployment, brakes and pilot pitch) together with
its coefficients:

    updated, coeffs = evaluate_segment(segment, alpha_deg, beta_deg, controls)

Callers thread ``updated`` forward; the input descriptor is never changed.

Segment kinds:
- cell: canopy cell on the span arc, brake camber and riser alpha offset
- flap: variable-area brake flap at a cell trailing edge
- lifting_body: full polar body with pitch offset (hanging pilot)
- unzippable_body: lifting body blending two polars by the unzip control
- parasitic: constant coefficients (lines, pilot chute)
- wingsuit_head: bluff body acting as a rudder in sideslip
- wingsuit_lifting: wingsuit body or wing panel with throttle response
"""

import dataclasses
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np
from archimedes import struct, field

# Handle imports
try:
    from .coefficients import get_all_coefficients, lerp_polar
    from .kirchhoff import DEG2RAD
    from .polar import Polar, SegmentControls
except ImportError:
    from coefficients import get_all_coefficients, lerp_polar
    from kirchhoff import DEG2RAD
    from polar import Polar, SegmentControls


@struct(frozen=True)
class ControlConstants:
    """Canopy control response."""

    alpha_max_riser: float = 10.0              # deg at full riser
    brake_alpha_coupling_deg: float = 2.5      # deg per unit effective brake
    max_flap_deflection_deg: float = 50.0      # TE deflection at full brake
    max_flap_roll_increment_deg: float = 20.0  # extra arc roll at full brake


@struct(frozen=True)
class WingsuitControlConstants:
    """Wingsuit throttle response."""

    pitch_alpha_max_deg: float = 3.5
    pitch_cp_shift: float = 0.13
    pitch_cl_alpha_delta: float = 0.2
    pitch_cd0_delta: float = 0.01

    yaw_body_y_shift: float = 0.03
    yaw_head_y_shift: float = 0.02
    yaw_roll_coupling_deg: float = 0.3
    yaw_dirty_coupling: float = 0.15

    roll_alpha_max_deg: float = 0.8
    roll_cl_alpha_delta: float = 0.15
    roll_cd0_delta: float = 0.005
    roll_dirty_coupling: float = 0.10

    dihedral_inner_max_deg: float = 16.0
    dihedral_outer_max_deg: float = 30.0


DEFAULT_CONSTANTS = ControlConstants()
DEFAULT_WINGSUIT_CONSTANTS = WingsuitControlConstants()

# Deployment morph (value at deploy = 0, lerped to nominal at deploy = 1)
DEPLOY_CD0_MULTIPLIER = 2.0
DEPLOY_CL_ALPHA_FRACTION = 0.3
DEPLOY_CD_N_MULTIPLIER = 1.5
DEPLOY_STALL_FWD_OFFSET = -17.0
DEPLOY_S1_FWD_MULTIPLIER = 4.0

# Forward x shift of the canopy at deploy = 0 (normalized)
DEPLOY_CHORD_OFFSET = 0.15


@struct(frozen=True)
class SegmentCoefficients:
    """Coefficients of one segment at its local flow."""

    cl: float
    cd: float
    cy: float
    cm: float
    cp: float


@struct(frozen=True)
class AeroSegment:
    """
    Immutable aerodynamic segment descriptor.

    Attributes
    ----------
    name : str
        Segment name
    kind : str
        Evaluation variant, one of SEGMENT_KINDS
    position : tuple
        Aerodynamic center, NED body frame, normalized by reference length
    s, chord : float
        Current reference area (m^2) and chord (m)
    roll_deg : float
        Arc angle of the panel (not an Euler angle)
    pitch_offset_deg : float
        Fixed pitch of the chord line relative to the body x axis
    chord_rotation_rad : float
        Additional rigid rotation of the chord line (pilot pitch)
    polar : Polar, optional
        Polar evaluated by the segment
    geometry : object
        Kind-specific construction geometry
    """

    name: str
    kind: str
    position: Tuple[float, float, float]
    s: float
    chord: float
    roll_deg: float = 0.0
    pitch_offset_deg: float = 0.0
    chord_rotation_rad: float = 0.0
    polar: Optional[Polar] = None
    geometry: Any = None

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]


# Kind-specific geometry records

@struct(frozen=True)
class CellGeometry:
    side: str
    brake_sensitivity: float
    riser_sensitivity: float
    full_s: float
    full_chord: float
    full_x: float
    full_y: float
    flap_chord_fraction: float = 0.0
    constants: ControlConstants = field(default_factory=ControlConstants)


@struct(frozen=True)
class FlapGeometry:
    side: str
    base_roll_deg: float
    brake_sensitivity: float
    full_max_flap_s: float
    full_max_flap_chord: float
    full_max_cp_shift: float
    parent_cell_x: float
    full_te_x: float
    full_te_y: float
    te_z: float
    constants: ControlConstants = field(default_factory=ControlConstants)


@struct(frozen=True)
class BodyGeometry:
    neutral_x: float
    neutral_z: float
    pivot: Optional[Tuple[float, float]] = None
    unzipped_polar: Optional[Polar] = None


@struct(frozen=True)
class ParasiticGeometry:
    cl: float
    cd: float
    cy: float


@struct(frozen=True)
class HeadGeometry:
    base_y: float
    cd: float
    constants: WingsuitControlConstants = field(default_factory=WingsuitControlConstants)


@struct(frozen=True)
class WingsuitGeometry:
    side: str
    wing_type: str
    base_y: float
    roll_sensitivity: float
    constants: WingsuitControlConstants = field(default_factory=WingsuitControlConstants)


# Helpers

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _side_sign(side: str) -> int:
    if side == 'right':
        return 1
    if side == 'left':
        return -1
    return 0


def local_flow_angles(alpha_deg: float, beta_deg: float, roll_rad: float) -> Tuple[float, float]:
    """Project freestream alpha/beta into a panel rolled by roll_rad."""
    c = np.cos(roll_rad)
    s = np.sin(roll_rad)
    return alpha_deg * c + beta_deg * s, -alpha_deg * s + beta_deg * c


def deploy_scales(deploy: float) -> Tuple[float, float, float, float]:
    """
    Canopy scale factors for a deployment fraction.

    Returns:
    --------
    d : float
        Deployment clamped to [0, 1]
    span_scale, chord_scale : float
        0.1 + 0.9 d and 0.3 + 0.7 d
    chord_offset : float
        Forward x shift (normalized), zero at full deployment
    """
    d = _clamp(deploy, 0.0, 1.0)
    return d, 0.1 + 0.9 * d, 0.3 + 0.7 * d, DEPLOY_CHORD_OFFSET * (1.0 - d)


def deploy_morph_polar(polar: Polar, deploy: float) -> Polar:
    """Degrade a canopy polar toward an uninflated fabric bundle."""
    d = _clamp(deploy, 0.0, 1.0)
    if d >= 1.0:
        return polar
    return dataclasses.replace(
        polar,
        cd_0=polar.cd_0 * (DEPLOY_CD0_MULTIPLIER + (1 - DEPLOY_CD0_MULTIPLIER) * d),
        cl_alpha=polar.cl_alpha * (DEPLOY_CL_ALPHA_FRACTION + (1 - DEPLOY_CL_ALPHA_FRACTION) * d),
        cd_n=polar.cd_n * (DEPLOY_CD_N_MULTIPLIER + (1 - DEPLOY_CD_N_MULTIPLIER) * d),
        alpha_stall_fwd=polar.alpha_stall_fwd + DEPLOY_STALL_FWD_OFFSET * (1 - d),
        s1_fwd=polar.s1_fwd * (DEPLOY_S1_FWD_MULTIPLIER + (1 - DEPLOY_S1_FWD_MULTIPLIER) * d),
    )


def _brake_input(side: str, controls: SegmentControls) -> float:
    if side == 'right':
        return controls.brake_right
    if side == 'left':
        return controls.brake_left
    return 0.0


def _coeffs(c: Dict[str, float], **overrides) -> SegmentCoefficients:
    values = {'cl': c['cl'], 'cd': c['cd'], 'cy': c['cy'], 'cm': c['cm'], 'cp': c['cp']}
    values.update(overrides)
    return SegmentCoefficients(**values)


def _pivot_position(geom: BodyGeometry, y: float, pilot_pitch_deg: float) -> Tuple[float, float, float]:
    """Aerodynamic center swung about the riser pivot by pilot pitch."""
    if geom.pivot is not None and abs(pilot_pitch_deg) > 0.01:
        delta = pilot_pitch_deg * DEG2RAD
        cos_d = np.cos(delta)
        sin_d = np.sin(delta)
        px, pz = geom.pivot
        dx = geom.neutral_x - px
        dz = geom.neutral_z - pz
        return (float(dx * cos_d - dz * sin_d + px), y, float(dx * sin_d + dz * cos_d + pz))
    return (geom.neutral_x, y, geom.neutral_z)


# Factories

def make_canopy_cell_segment(name: str, position, roll_deg: float, side: str,
                             brake_sensitivity: float, riser_sensitivity: float,
                             cell_polar: Polar, flap_chord_fraction: float = 0.0,
                             constants: ControlConstants = DEFAULT_CONSTANTS) -> AeroSegment:
    """
    Canopy cell on the span arc.

    Parameters:
    -----------
    name : str
        Segment name, e.g. 'cell_r2'
    position : tuple
        Normalized NED position at full deployment
    roll_deg : float
        Arc angle of the cell (0 center, +-12/24/36 outboard)
    side : str
        'left', 'right' or 'center' for control routing. The center cell
        receives no brake.
    brake_sensitivity, riser_sensitivity : float
        Fraction of brake / riser input seen by this cell
    cell_polar : Polar
        Cell airfoil polar; its s and chord are the full-flight values
    flap_chord_fraction : float
        Chord fraction handed to the brake flap at full effective brake.
        The cell gives up exactly the area its flap gains.
    constants : ControlConstants
        Control response constants
    """
    x, y, z = (float(v) for v in position)
    geom = CellGeometry(
        side=side,
        brake_sensitivity=brake_sensitivity,
        riser_sensitivity=riser_sensitivity,
        full_s=cell_polar.s,
        full_chord=cell_polar.chord,
        full_x=x,
        full_y=y,
        flap_chord_fraction=flap_chord_fraction,
        constants=constants,
    )
    return AeroSegment(name=name, kind='cell', position=(x, y, z), s=cell_polar.s,
                       chord=cell_polar.chord, roll_deg=roll_deg, polar=cell_polar,
                       geometry=geom)


def make_brake_flap_segment(name: str, trailing_edge_position, roll_deg: float, side: str,
                            brake_sensitivity: float, flap_chord_fraction: float,
                            parent_cell_s: float, parent_cell_chord: float,
                            parent_cell_x: float, flap_polar: Polar,
                            reference_length: float = 1.875,
                            constants: ControlConstants = DEFAULT_CONSTANTS) -> AeroSegment:
    """
    Variable-area brake flap at a cell trailing edge.

    Area and chord grow from zero with effective brake. The aerodynamic
    center travels from the trailing edge toward the parent cell quarter
    chord, and the panel rolls further outboard as the fabric curls.
    """
    te_x, te_y, te_z = (float(v) for v in trailing_edge_position)
    geom = FlapGeometry(
        side=side,
        base_roll_deg=roll_deg,
        brake_sensitivity=brake_sensitivity,
        full_max_flap_s=flap_chord_fraction * parent_cell_s,
        full_max_flap_chord=flap_chord_fraction * parent_cell_chord,
        full_max_cp_shift=0.25 * parent_cell_chord / reference_length,
        parent_cell_x=parent_cell_x,
        full_te_x=te_x,
        full_te_y=te_y,
        te_z=te_z,
        constants=constants,
    )
    return AeroSegment(name=name, kind='flap', position=(te_x, te_y, te_z), s=0.0,
                       chord=0.0, roll_deg=roll_deg, polar=flap_polar, geometry=geom)


def make_lifting_body_segment(name: str, position, body_polar: Polar,
                              pitch_offset_deg: float = 0.0,
                              pivot: Optional[Tuple[float, float]] = None) -> AeroSegment:
    """
    Lifting body evaluated with its full polar at alpha - pitch offset.

    A pilot hanging under a canopy has pitch_offset_deg = 90. ``pivot`` is
    the (x, z) riser attachment the body swings about under pilot pitch.
    """
    x, y, z = (float(v) for v in position)
    geom = BodyGeometry(neutral_x=x, neutral_z=z, pivot=pivot)
    return AeroSegment(name=name, kind='lifting_body', position=(x, y, z), s=body_polar.s,
                       chord=body_polar.chord, pitch_offset_deg=pitch_offset_deg,
                       polar=body_polar, geometry=geom)


def make_unzippable_pilot_segment(name: str, position, zipped_polar: Polar,
                                  unzipped_polar: Polar, pitch_offset_deg: float = 0.0,
                                  pivot: Optional[Tuple[float, float]] = None) -> AeroSegment:
    """Lifting body blending zipped (unzip = 0) and unzipped (unzip = 1) polars."""
    x, y, z = (float(v) for v in position)
    geom = BodyGeometry(neutral_x=x, neutral_z=z, pivot=pivot, unzipped_polar=unzipped_polar)
    return AeroSegment(name=name, kind='unzippable_body', position=(x, y, z),
                       s=zipped_polar.s, chord=zipped_polar.chord,
                       pitch_offset_deg=pitch_offset_deg, polar=zipped_polar, geometry=geom)


def make_parasitic_segment(name: str, position, s: float, chord: float, cd: float,
                           cl: float = 0.0, cy: float = 0.0) -> AeroSegment:
    """Constant-coefficient drag body; ignores flow angles and controls."""
    return AeroSegment(name=name, kind='parasitic', position=tuple(float(v) for v in position),
                       s=s, chord=chord, geometry=ParasiticGeometry(cl=cl, cd=cd, cy=cy))


def make_wingsuit_head_segment(name: str, position, s: float, chord: float, cd: float,
                               constants: WingsuitControlConstants = DEFAULT_WINGSUIT_CONSTANTS
                               ) -> AeroSegment:
    """Helmeted head: drag plus a rudder-like side force in sideslip."""
    x, y, z = (float(v) for v in position)
    geom = HeadGeometry(base_y=y, cd=cd, constants=constants)
    return AeroSegment(name=name, kind='wingsuit_head', position=(x, y, z), s=s,
                       chord=chord, geometry=geom)


def make_wingsuit_lifting_segment(name: str, position, base_roll_deg: float, side: str,
                                  segment_polar: Polar, roll_sensitivity: float,
                                  wing_type: str,
                                  constants: WingsuitControlConstants = DEFAULT_WINGSUIT_CONSTANTS
                                  ) -> AeroSegment:
    """
    Wingsuit body or wing panel.

    Responds to pitch/yaw/roll throttles, dihedral (wing_type 'inner' or
    'outer') and dirty flying. wing_type 'body' shifts laterally with yaw.
    """
    x, y, z = (float(v) for v in position)
    geom = WingsuitGeometry(side=side, wing_type=wing_type, base_y=y,
                            roll_sensitivity=roll_sensitivity, constants=constants)
    return AeroSegment(name=name, kind='wingsuit_lifting', position=(x, y, z),
                       s=segment_polar.s, chord=segment_polar.chord,
                       roll_deg=base_roll_deg, polar=segment_polar, geometry=geom)


# Evaluation

def _evaluate_cell(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                   controls: SegmentControls):
    geom = seg.geometry
    ctrl = geom.constants
    d, span_scale, chord_scale, chord_offset = deploy_scales(controls.deploy)

    brake = _brake_input(geom.side, controls)
    effective_brake = brake * geom.brake_sensitivity

    # Area handed over to the brake flap
    flap_share = effective_brake * geom.flap_chord_fraction
    updated = dataclasses.replace(
        seg,
        s=geom.full_s * chord_scale * span_scale * (1.0 - flap_share),
        chord=geom.full_chord * chord_scale,
        position=(geom.full_x + chord_offset, geom.full_y * span_scale, seg.position[2]),
    )

    alpha_local, beta_local = local_flow_angles(alpha_deg, beta_deg, seg.roll_deg * DEG2RAD)

    if geom.side == 'center':
        front = (controls.front_riser_left + controls.front_riser_right) / 2
        rear = (controls.rear_riser_left + controls.rear_riser_right) / 2
    elif geom.side == 'right':
        front = controls.front_riser_right
        rear = controls.rear_riser_right
    else:
        front = controls.front_riser_left
        rear = controls.rear_riser_left
    d_alpha_riser = (-front + rear) * ctrl.alpha_max_riser * geom.riser_sensitivity
    d_alpha_brake = effective_brake * ctrl.brake_alpha_coupling_deg

    polar = deploy_morph_polar(seg.polar, d)
    c = get_all_coefficients(alpha_local + d_alpha_riser + d_alpha_brake, beta_local,
                             effective_brake, polar)
    return updated, _coeffs(c)


def _evaluate_flap(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                   controls: SegmentControls):
    geom = seg.geometry
    ctrl = geom.constants
    d, span_scale, chord_scale, chord_offset = deploy_scales(controls.deploy)

    max_flap_s = geom.full_max_flap_s * chord_scale * span_scale
    max_flap_chord = geom.full_max_flap_chord * chord_scale
    max_cp_shift = geom.full_max_cp_shift * chord_scale
    te_x = (geom.parent_cell_x + chord_offset
            + (geom.full_te_x - geom.parent_cell_x) * chord_scale)

    effective_brake = _brake_input(geom.side, controls) * geom.brake_sensitivity
    position = (te_x + effective_brake * max_cp_shift, geom.full_te_y * span_scale, geom.te_z)

    if effective_brake < 0.001:
        updated = dataclasses.replace(seg, s=effective_brake * max_flap_s,
                                      chord=effective_brake * max_flap_chord,
                                      position=position, roll_deg=geom.base_roll_deg)
        return updated, SegmentCoefficients(cl=0.0, cd=0.0, cy=0.0, cm=0.0, cp=0.25)

    # Brake curls the fabric further outboard
    roll_sign = 1.0 if geom.base_roll_deg >= 0 else -1.0
    roll_increment = effective_brake * ctrl.max_flap_roll_increment_deg * roll_sign
    roll_deg = geom.base_roll_deg + roll_increment
    theta = roll_deg * DEG2RAD

    updated = dataclasses.replace(seg, s=effective_brake * max_flap_s,
                                  chord=effective_brake * max_flap_chord,
                                  position=position, roll_deg=roll_deg)

    alpha_local, beta_local = local_flow_angles(alpha_deg, beta_deg, theta)
    alpha_flap = alpha_local + effective_brake * ctrl.max_flap_deflection_deg

    polar = deploy_morph_polar(seg.polar, d)
    c = get_all_coefficients(alpha_flap, beta_local, 0.0, polar)

    # Lift of the rolled panel splits into vertical and lateral parts
    return updated, _coeffs(c, cl=c['cl'] * np.cos(theta), cy=c['cy'] + c['cl'] * np.sin(theta))


def _evaluate_body(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                   controls: SegmentControls):
    geom = seg.geometry
    pilot_pitch = controls.pilot_pitch

    if seg.kind == 'unzippable_body':
        t = _clamp(controls.unzip, 0.0, 1.0)
        if t == 0:
            polar = seg.polar
        elif t == 1:
            polar = geom.unzipped_polar
        else:
            polar = lerp_polar(t, seg.polar, geom.unzipped_polar)
        s, chord = polar.s, polar.chord
    else:
        polar = seg.polar
        s, chord = seg.s, seg.chord

    updated = dataclasses.replace(
        seg,
        s=s,
        chord=chord,
        position=_pivot_position(geom, seg.position[1], pilot_pitch),
        chord_rotation_rad=pilot_pitch * DEG2RAD,
    )

    local_alpha = alpha_deg - (seg.pitch_offset_deg + pilot_pitch)
    c = get_all_coefficients(local_alpha, beta_deg, controls.delta, polar, controls.dirty)
    return updated, _coeffs(c)


def _evaluate_parasitic(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                        controls: SegmentControls):
    geom = seg.geometry
    return seg, SegmentCoefficients(cl=geom.cl, cd=geom.cd, cy=geom.cy, cm=0.0, cp=0.25)


def _evaluate_head(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                   controls: SegmentControls):
    geom = seg.geometry
    y = geom.base_y + controls.yaw_throttle * geom.constants.yaw_head_y_shift
    updated = dataclasses.replace(seg, position=(seg.position[0], y, seg.position[2]))
    # Sphere side force in sideslip
    cy = -0.5 * np.sin(beta_deg * DEG2RAD)
    return updated, SegmentCoefficients(cl=0.0, cd=geom.cd, cy=float(cy), cm=0.0, cp=0.5)


def _evaluate_wingsuit(seg: AeroSegment, alpha_deg: float, beta_deg: float,
                       controls: SegmentControls):
    geom = seg.geometry
    ctrl = geom.constants
    side_sign = _side_sign(geom.side)

    dihedral = _clamp(controls.dihedral, 0.0, 1.0)
    if geom.wing_type == 'inner':
        roll_deg = side_sign * ctrl.dihedral_inner_max_deg * dihedral
    elif geom.wing_type == 'outer':
        roll_deg = side_sign * ctrl.dihedral_outer_max_deg * dihedral
    else:
        roll_deg = 0.0
    theta = roll_deg * DEG2RAD

    alpha_local, beta_local = local_flow_angles(alpha_deg, beta_deg, theta)

    pitch_t = _clamp(controls.pitch_throttle, -1.0, 1.0)
    roll_t = _clamp(controls.roll_throttle, -1.0, 1.0)
    yaw_t = _clamp(controls.yaw_throttle, -1.0, 1.0)

    alpha_eff = (alpha_local
                 + pitch_t * ctrl.pitch_alpha_max_deg
                 + roll_t * ctrl.roll_alpha_max_deg * geom.roll_sensitivity * side_sign
                 + yaw_t * ctrl.yaw_roll_coupling_deg * side_sign)

    position = seg.position
    if geom.wing_type == 'body':
        position = (position[0], geom.base_y + yaw_t * ctrl.yaw_body_y_shift, position[2])
    updated = dataclasses.replace(seg, position=position, roll_deg=roll_deg)

    # Throttles change suit tension
    dirty = _clamp(controls.dirty, 0.0, 1.0)
    dirty_eff = _clamp(dirty + yaw_t * ctrl.yaw_dirty_coupling * side_sign
                       + abs(roll_t) * ctrl.roll_dirty_coupling, 0.0, 1.0)

    c = get_all_coefficients(alpha_eff, beta_local, controls.delta, seg.polar, dirty_eff)
    return updated, _coeffs(
        c,
        cl=c['cl'] * np.cos(theta),
        cy=c['cy'] + c['cl'] * np.sin(theta),
        cp=c['cp'] + pitch_t * ctrl.pitch_cp_shift,
    )


_EVALUATORS: Dict[str, Callable] = {
    'cell': _evaluate_cell,
    'flap': _evaluate_flap,
    'lifting_body': _evaluate_body,
    'unzippable_body': _evaluate_body,
    'parasitic': _evaluate_parasitic,
    'wingsuit_head': _evaluate_head,
    'wingsuit_lifting': _evaluate_wingsuit,
}

SEGMENT_KINDS = tuple(_EVALUATORS)


def evaluate_segment(segment: AeroSegment, alpha_deg: float, beta_deg: float,
                     controls: SegmentControls) -> Tuple[AeroSegment, SegmentCoefficients]:
    """
    Evaluate one segment at a freestream flow condition.

    Parameters:
    -----------
    segment : AeroSegment
        Segment descriptor
    alpha_deg, beta_deg : float
        Flow angles seen by the segment (deg)
    controls : SegmentControls
        Live control inputs

    Returns:
    --------
    updated : AeroSegment
        Descriptor with area, chord, position, roll and chord rotation
        matching the controls
    coeffs : SegmentCoefficients
        cl, cd, cy, cm and cp (chord fraction)
    """
    try:
        evaluator = _EVALUATORS[segment.kind]
    except KeyError:
        raise ValueError(f"Unknown segment kind: {segment.kind}")
    return evaluator(segment, alpha_deg, beta_deg, controls)


if __name__ == "__main__":
    from glidesim.polars.library import CANOPY_CELL_POLAR, BRAKE_FLAP_POLAR

    print("=== Cell + flap area under brake ===")
    cell = make_canopy_cell_segment('cell_r3', (0.145, 1.052, -0.954), 36, 'right',
                                    1.0, 1.0, CANOPY_CELL_POLAR, flap_chord_fraction=0.30)
    flap = make_brake_flap_segment('flap_r3', (-0.689, 1.052, -0.901), 36, 'right',
                                   1.0, 0.30, CANOPY_CELL_POLAR.s, 2.5, 0.145,
                                   BRAKE_FLAP_POLAR)
    for brake in (0.0, 0.25, 0.5, 0.75, 1.0):
        ctrl = SegmentControls(brake_right=brake)
        cell_u, cell_c = evaluate_segment(cell, 8.0, 0.0, ctrl)
        flap_u, flap_c = evaluate_segment(flap, 8.0, 0.0, ctrl)
        print(f"  brake={brake:4.2f}  S_cell={cell_u.s:6.3f}  S_flap={flap_u.s:6.3f}  "
              f"total={cell_u.s + flap_u.s:6.3f}  CL_flap={flap_c.cl:6.3f}")
