"""
Data types shared by the aerodynamic and mass models.

Defines:
- Polar: continuous aerodynamic profile for one surface or whole vehicle
- SymmetricControl: per-unit offsets applied to a Polar by a control input
- MassSegment: point mass with a height-normalized body-frame position
- SegmentControls: flat control-input bundle passed to every segment

Body-frame convention throughout the package is NED: x forward, y right,
z down.
"""

from typing import Dict, Optional, Tuple

from archimedes import struct, field


@struct(frozen=True)
class SymmetricControl:
    """
    Additive polar offsets per unit of control input.

    Angles are in degrees, slopes in 1/rad, everything else dimensionless.
    """

    d_alpha_0: float = 0.0
    d_cd_0: float = 0.0
    d_cl_alpha: float = 0.0
    d_k: float = 0.0
    d_alpha_stall_fwd: float = 0.0
    d_alpha_stall_back: float = 0.0
    d_cd_n: float = 0.0
    d_cp_0: float = 0.0
    d_cp_alpha: float = 0.0
    cm_delta: float = 0.0


@struct(frozen=True)
class MassSegment:
    """Point mass: fraction of system mass at a height-normalized position."""

    name: str
    mass_ratio: float
    position: Tuple[float, float, float]

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]


@struct(frozen=True)
class Polar:
    """
    Continuous polar: closed-form aerodynamic profile.

    Attributes
    ----------
    cl_alpha : float
        Lift curve slope (1/rad)
    alpha_0 : float
        Zero-lift angle of attack (deg)
    cd_0, k : float
        Parasitic drag and induced drag factor (CD = CD_0 + K*CL^2)
    cd_n, cd_n_lateral : float
        Broadside normal-force and lateral drag coefficients
    alpha_stall_fwd, s1_fwd : float
        Forward stall angle and transition width (deg)
    alpha_stall_back, s1_back : float
        Back stall angle and transition width (deg)
    cy_beta, cn_beta, cl_beta : float
        Side force, yaw and roll derivatives (1/rad)
    cm_0, cm_alpha : float
        Attached-flow pitching moment
    cp_0, cp_alpha : float
        Attached-flow center of pressure (chord fraction from LE)
    cg, cp_lateral : float
        CG and lateral CP as chord fractions
    s, m, chord : float
        Reference area (m^2), mass (kg), reference chord (m)
    controls : dict
        Optional SymmetricControl keyed by 'brake', 'front_riser',
        'rear_riser' or 'dirty'
    mass_segments : tuple
        Weight mass segments (gravity and CG)
    inertia_mass_segments : tuple, optional
        Inertia mass segments when they differ from the weight set
    """

    name: str
    type: str

    cl_alpha: float
    alpha_0: float

    cd_0: float
    k: float

    cd_n: float
    cd_n_lateral: float

    alpha_stall_fwd: float
    s1_fwd: float
    alpha_stall_back: float
    s1_back: float

    cy_beta: float
    cn_beta: float
    cl_beta: float

    cm_0: float
    cm_alpha: float

    cp_0: float
    cp_alpha: float

    cg: float
    cp_lateral: float

    s: float
    m: float
    chord: float

    controls: Dict[str, SymmetricControl] = field(default_factory=dict)
    mass_segments: Tuple[MassSegment, ...] = ()
    inertia_mass_segments: Optional[Tuple[MassSegment, ...]] = None
    cg_offset_fraction: float = 0.0
    reference_length: float = 1.875

    @property
    def inertia_segments(self) -> Tuple[MassSegment, ...]:
        """Mass segments used for the inertia tensor."""
        if self.inertia_mass_segments is not None:
            return self.inertia_mass_segments
        return self.mass_segments


# Scalar fields blended by lerp_polar
POLAR_SCALAR_FIELDS = (
    'cl_alpha', 'alpha_0', 'cd_0', 'k', 'cd_n', 'cd_n_lateral',
    'alpha_stall_fwd', 's1_fwd', 'alpha_stall_back', 's1_back',
    'cy_beta', 'cn_beta', 'cl_beta', 'cm_0', 'cm_alpha',
    'cp_0', 'cp_alpha', 'cg', 'cp_lateral', 's', 'm', 'chord',
)


@struct(frozen=False)
class SegmentControls:
    """
    Control inputs for one frame.

    Canopy: brakes, risers, weight shift. Wingsuit: throttles, dihedral,
    dirty flying. Shared: delta (generic symmetric control), unzip,
    pilot_pitch (deg) and deploy (canopy inflation, 0 packed to 1 open).
    Segments read only the fields they respond to.
    """

    brake_left: float = 0.0
    brake_right: float = 0.0
    front_riser_left: float = 0.0
    front_riser_right: float = 0.0
    rear_riser_left: float = 0.0
    rear_riser_right: float = 0.0
    weight_shift_lr: float = 0.0

    elevator: float = 0.0
    rudder: float = 0.0
    aileron_left: float = 0.0
    aileron_right: float = 0.0
    flap: float = 0.0

    pitch_throttle: float = 0.0
    yaw_throttle: float = 0.0
    roll_throttle: float = 0.0
    dihedral: float = 0.5
    wingsuit_deploy: float = 0.0

    delta: float = 0.0
    dirty: float = 0.0
    unzip: float = 0.0
    pilot_pitch: float = 0.0
    deploy: float = 1.0


def default_controls() -> SegmentControls:
    """Neutral controls: fully deployed canopy, half dihedral."""
    return SegmentControls()
