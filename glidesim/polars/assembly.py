"""
Segmented vehicle assemblies.

Builds aero segment lists from the polar library. Polars are all defined
first (library.py); assembly functions only reference them.
"""

import logging
from typing import List

# Handle imports
try:
    from ..core.segments import (
        AeroSegment, make_canopy_cell_segment, make_brake_flap_segment,
        make_lifting_body_segment, make_unzippable_pilot_segment,
        make_parasitic_segment, make_wingsuit_head_segment,
        make_wingsuit_lifting_segment,
    )
    from .library import (
        AURAFIVE_POLAR, SLICKSIN_POLAR, CANOPY_CELL_POLAR, BRAKE_FLAP_POLAR,
        A5_CENTER_POLAR, A5_INNER_WING_POLAR, A5_OUTER_WING_POLAR,
        IBEX_AREA, IBEX_CELLS,
    )
except ImportError:
    from glidesim.core.segments import (
        AeroSegment, make_canopy_cell_segment, make_brake_flap_segment,
        make_lifting_body_segment, make_unzippable_pilot_segment,
        make_parasitic_segment, make_wingsuit_head_segment,
        make_wingsuit_lifting_segment,
    )
    from glidesim.polars.library import (
        AURAFIVE_POLAR, SLICKSIN_POLAR, CANOPY_CELL_POLAR, BRAKE_FLAP_POLAR,
        A5_CENTER_POLAR, A5_INNER_WING_POLAR, A5_OUTER_WING_POLAR,
        IBEX_AREA, IBEX_CELLS,
    )

logger = logging.getLogger(__name__)

PILOT_TYPES = ('wingsuit', 'slick')

# Ibex UL canopy

CELL_CHORD = 2.5
CELL_AREA = IBEX_AREA / IBEX_CELLS
PILOT_POSITION = (0.38, 0.0, 0.48)
PILOT_PITCH_OFFSET_DEG = 90.0

# tag, position, arc roll (deg), side, brake sensitivity, flap chord fraction
_IBEX_CELLS = [
    ('c', (0.174, 0.0, -1.220), 0.0, 'center', 0.0, 0.0),
    ('r1', (0.170, 0.358, -1.182), 12.0, 'right', 0.4, 0.10),
    ('l1', (0.170, -0.358, -1.182), -12.0, 'left', 0.4, 0.10),
    ('r2', (0.162, 0.735, -1.114), 24.0, 'right', 0.7, 0.20),
    ('l2', (0.162, -0.735, -1.114), -24.0, 'left', 0.7, 0.20),
    ('r3', (0.145, 1.052, -0.954), 36.0, 'right', 1.0, 0.30),
    ('l3', (0.145, -1.052, -0.954), -36.0, 'left', 1.0, 0.30),
]

# tag, trailing-edge position
_IBEX_FLAP_TE = {
    'r1': (-0.664, 0.358, -1.162),
    'l1': (-0.664, -0.358, -1.162),
    'r2': (-0.672, 0.735, -1.062),
    'l2': (-0.672, -0.735, -1.062),
    'r3': (-0.689, 1.052, -0.901),
    'l3': (-0.689, -1.052, -0.901),
}


def make_ibex_canopy_segments() -> List[AeroSegment]:
    """Seven cells, six brake flaps, lines and pilot chute."""
    cells = []
    flaps = []
    for tag, pos, roll, side, brake_sens, flap_frac in _IBEX_CELLS:
        cells.append(make_canopy_cell_segment(
            f'cell_{tag}', pos, roll, side, brake_sens, 1.0, CANOPY_CELL_POLAR,
            flap_chord_fraction=flap_frac))
        if flap_frac > 0:
            flaps.append(make_brake_flap_segment(
                f'flap_{tag}', _IBEX_FLAP_TE[tag], roll, side, brake_sens, flap_frac,
                CELL_AREA, CELL_CHORD, pos[0], BRAKE_FLAP_POLAR))

    parasitic = [
        make_parasitic_segment('lines', (0.23, 0.0, -0.40), 0.35, 0.01, 1.0),
        make_parasitic_segment('pc', (0.10, 0.0, -1.30), 0.732, 0.01, 1.0),
    ]
    return cells + flaps + parasitic


def make_ibex_aero_segments(pilot_type: str = 'wingsuit') -> List[AeroSegment]:
    """
    Ibex UL canopy with a hanging pilot.

    Parameters:
    -----------
    pilot_type : str
        'wingsuit' (unzippable Aura 5 -> Slick Sin pilot) or 'slick'

    Returns:
    --------
    segments : list of AeroSegment
    """
    if pilot_type == 'wingsuit':
        pilot = make_unzippable_pilot_segment('pilot', PILOT_POSITION, AURAFIVE_POLAR,
                                              SLICKSIN_POLAR, PILOT_PITCH_OFFSET_DEG)
    elif pilot_type == 'slick':
        pilot = make_lifting_body_segment('pilot', PILOT_POSITION, SLICKSIN_POLAR,
                                          PILOT_PITCH_OFFSET_DEG)
    else:
        raise ValueError(f"Unknown pilot type: {pilot_type}. Choose from {PILOT_TYPES}")

    segments = make_ibex_canopy_segments() + [pilot]
    logger.debug(f"Assembled Ibex UL with {pilot_type} pilot: {len(segments)} segments")
    return segments


# A5 segmented wingsuit

A5_SYS_CHORD = 1.8       # m
A5_CG_XC = 0.40          # CG as chord fraction
A5_HEIGHT = 1.875        # m
GLB_TO_NED = 0.2962      # model span units to normalized y


def a5xc(xc: float) -> float:
    """Normalized x of a chord station x/c (positive forward of the CG)."""
    return (A5_CG_XC - xc) * A5_SYS_CHORD / A5_HEIGHT


A5_HEAD_S = 0.07
A5_HEAD_CHORD = 0.13
A5_HEAD_CD = 0.42


def make_a5_segments_aero_segments() -> List[AeroSegment]:
    """Head, center body, inner and outer wing panels of the Aura 5."""
    inner_x = a5xc(0.48)
    inner_y = 0.72 * GLB_TO_NED
    outer_x = a5xc(0.37)
    outer_y = 1.10 * GLB_TO_NED
    return [
        make_wingsuit_head_segment('head', (a5xc(0.13), 0.0, 0.0), A5_HEAD_S, A5_HEAD_CHORD,
                                   A5_HEAD_CD),
        make_wingsuit_lifting_segment('center', (a5xc(0.46), 0.0, 0.0), 0.0, 'center',
                                      A5_CENTER_POLAR, 0.3, 'body'),
        make_wingsuit_lifting_segment('r1', (inner_x, inner_y, 0.0), 0.0, 'right',
                                      A5_INNER_WING_POLAR, 0.6, 'inner'),
        make_wingsuit_lifting_segment('l1', (inner_x, -inner_y, 0.0), 0.0, 'left',
                                      A5_INNER_WING_POLAR, 0.6, 'inner'),
        make_wingsuit_lifting_segment('r2', (outer_x, outer_y, 0.0), 0.0, 'right',
                                      A5_OUTER_WING_POLAR, 1.0, 'outer'),
        make_wingsuit_lifting_segment('l2', (outer_x, -outer_y, 0.0), 0.0, 'left',
                                      A5_OUTER_WING_POLAR, 1.0, 'outer'),
    ]
