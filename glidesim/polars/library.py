"""
Continuous polar library.

Whole-vehicle polars (Aura 5 wingsuit, Ibex UL canopy, Slick Sin skydiver,
Caravan airplane) plus the component polars used by segmented models:
canopy cell, brake flap and the A5 wingsuit panels.
"""

# Handle imports
try:
    from ..core.polar import Polar, SymmetricControl
    from .mass import WINGSUIT_MASS_SEGMENTS, CANOPY_WEIGHT_SEGMENTS, CANOPY_INERTIA_SEGMENTS
except ImportError:
    from glidesim.core.polar import Polar, SymmetricControl
    from glidesim.polars.mass import (
        WINGSUIT_MASS_SEGMENTS, CANOPY_WEIGHT_SEGMENTS, CANOPY_INERTIA_SEGMENTS,
    )

IBEX_AREA = 20.439
IBEX_CELLS = 7

# Whole-vehicle polars

_AURAFIVE_BRAKE = SymmetricControl(d_cp_0=0.03, d_alpha_0=-0.5, d_cd_0=0.005,
                                   d_alpha_stall_fwd=-1.0)
_AURAFIVE_DIRTY = SymmetricControl(d_cd_0=0.025, d_cl_alpha=-0.3, d_k=0.08,
                                   d_alpha_stall_fwd=-3.0, d_cp_0=0.03, d_cp_alpha=0.02)

AURAFIVE_POLAR = Polar(
    name='Aura 5',
    type='Wingsuit',
    cl_alpha=2.9, alpha_0=-2.0,
    cd_0=0.097, k=0.360,
    cd_n=1.1, cd_n_lateral=1.0,
    alpha_stall_fwd=31.5, s1_fwd=3.7,
    alpha_stall_back=-34.5, s1_back=7.0,
    cy_beta=-0.3, cn_beta=0.08, cl_beta=-0.08,
    cm_0=-0.02, cm_alpha=-0.08,
    cp_0=0.40, cp_alpha=-0.05,
    cg=0.40, cp_lateral=0.50,
    s=2.0, m=77.5, chord=1.8,
    controls={'brake': _AURAFIVE_BRAKE, 'dirty': _AURAFIVE_DIRTY},
    mass_segments=WINGSUIT_MASS_SEGMENTS,
    cg_offset_fraction=0.137,
)

# Segmented A5: same system-level values, evaluated through its panels
A5_SEGMENTS_POLAR = Polar(
    name='A5 Segments',
    type='Wingsuit',
    cl_alpha=2.9, alpha_0=-2.0,
    cd_0=0.097, k=0.360,
    cd_n=1.1, cd_n_lateral=1.0,
    alpha_stall_fwd=31.5, s1_fwd=3.7,
    alpha_stall_back=-34.5, s1_back=7.0,
    cy_beta=-0.3, cn_beta=0.08, cl_beta=-0.08,
    cm_0=-0.02, cm_alpha=-0.08,
    cp_0=0.40, cp_alpha=-0.05,
    cg=0.40, cp_lateral=0.50,
    s=2.0, m=77.5, chord=1.8,
    controls={'brake': _AURAFIVE_BRAKE, 'dirty': _AURAFIVE_DIRTY},
    mass_segments=WINGSUIT_MASS_SEGMENTS,
    cg_offset_fraction=0.137,
)

IBEXUL_POLAR = Polar(
    name='Ibex UL',
    type='Canopy',
    cl_alpha=1.75, alpha_0=-3.0,
    cd_0=0.21, k=0.085,
    cd_n=1.1, cd_n_lateral=0.8,
    alpha_stall_fwd=15.0, s1_fwd=4.0,
    alpha_stall_back=-5.0, s1_back=3.0,
    cy_beta=-0.4, cn_beta=0.12, cl_beta=-0.12,
    cm_0=-0.03, cm_alpha=-0.10,
    cp_0=0.40, cp_alpha=-0.01,
    cg=0.35, cp_lateral=0.50,
    s=IBEX_AREA, m=77.5, chord=2.5,
    controls={
        'brake': SymmetricControl(d_alpha_0=-3.0, d_cd_0=0.06, d_cl_alpha=0.15, d_k=0.03,
                                  d_alpha_stall_fwd=-5.0, cm_delta=-0.04),
    },
    mass_segments=CANOPY_WEIGHT_SEGMENTS,
    inertia_mass_segments=CANOPY_INERTIA_SEGMENTS,
    cg_offset_fraction=0.0,
)

SLICKSIN_POLAR = Polar(
    name='Slick Sin',
    type='Slick',
    cl_alpha=1.45, alpha_0=0.0,
    cd_0=0.467, k=0.70,
    cd_n=1.505, cd_n_lateral=1.3,
    alpha_stall_fwd=45.0, s1_fwd=8.0,
    alpha_stall_back=-45.0, s1_back=8.0,
    cy_beta=-0.2, cn_beta=0.04, cl_beta=-0.04,
    cm_0=0.0, cm_alpha=-0.05,
    cp_0=0.40, cp_alpha=-0.01,
    cg=0.50, cp_lateral=0.50,
    s=0.5, m=77.5, chord=1.7,
)

CARAVAN_POLAR = Polar(
    name='Caravan',
    type='Airplane',
    cl_alpha=4.8, alpha_0=-2.0,
    cd_0=0.029, k=0.485,
    cd_n=1.2, cd_n_lateral=1.0,
    alpha_stall_fwd=22.0, s1_fwd=4.0,
    alpha_stall_back=-4.0, s1_back=3.0,
    cy_beta=-0.4, cn_beta=0.10, cl_beta=-0.10,
    cm_0=-0.02, cm_alpha=-0.10,
    cp_0=0.39, cp_alpha=-0.04,
    cg=0.30, cp_lateral=0.30,
    s=2.0, m=77.5, chord=11.0,
)

# Canopy components

# One of seven cells: canopy-only profile drag, system drag lives in the
# line, pilot and pilot-chute segments.
CANOPY_CELL_POLAR = Polar(
    name='Ibex UL Cell',
    type='Canopy',
    cl_alpha=3.0, alpha_0=-3.0,
    cd_0=0.035, k=0.04,
    cd_n=1.1, cd_n_lateral=0.8,
    alpha_stall_fwd=22.0, s1_fwd=6.0,
    alpha_stall_back=-5.0, s1_back=3.0,
    cy_beta=-0.4, cn_beta=0.12, cl_beta=-0.12,
    cm_0=-0.03, cm_alpha=-0.10,
    cp_0=0.40, cp_alpha=-0.01,
    cg=0.35, cp_lateral=0.50,
    s=IBEX_AREA / IBEX_CELLS, m=77.5, chord=2.5,
    controls={
        'brake': SymmetricControl(d_alpha_0=-5.0, d_cd_0=0.09, d_cl_alpha=0.35, d_k=0.03,
                                  d_alpha_stall_fwd=-4.0, cm_delta=-0.04),
    },
)

# s and chord are placeholders; the flap factory sizes the panel
BRAKE_FLAP_POLAR = Polar(
    name='Brake Flap',
    type='Canopy',
    cl_alpha=4.0, alpha_0=0.0,
    cd_0=0.02, k=0.05,
    cd_n=1.2, cd_n_lateral=0.8,
    alpha_stall_fwd=70.0, s1_fwd=8.0,
    alpha_stall_back=-5.0, s1_back=3.0,
    cy_beta=-0.1, cn_beta=0.02, cl_beta=-0.02,
    cm_0=-0.05, cm_alpha=-0.05,
    cp_0=0.60, cp_alpha=-0.01,
    cg=0.35, cp_lateral=0.50,
    s=0.5, m=77.5, chord=0.5,
)

# A5 wingsuit panels

A5_CENTER_POLAR = Polar(
    name='A5 Center',
    type='Wingsuit',
    cl_alpha=3.2, alpha_0=-2.0,
    cd_0=0.08, k=0.35,
    cd_n=1.2, cd_n_lateral=1.0,
    alpha_stall_fwd=31.5, s1_fwd=3.7,
    alpha_stall_back=-34.5, s1_back=7.0,
    cy_beta=-0.3, cn_beta=0.08, cl_beta=-0.04,
    cm_0=-0.02, cm_alpha=-0.10,
    cp_0=0.25, cp_alpha=-0.05,
    cg=0.40, cp_lateral=0.50,
    s=0.85, m=77.5, chord=1.93,
    controls={'dirty': SymmetricControl(d_cd_0=0.015, d_cl_alpha=-0.15, d_alpha_stall_fwd=-2.0)},
)

A5_INNER_WING_POLAR = Polar(
    name='A5 Inner Wing',
    type='Wingsuit',
    cl_alpha=2.8, alpha_0=-1.0,
    cd_0=0.05, k=0.30,
    cd_n=1.0, cd_n_lateral=0.8,
    alpha_stall_fwd=31.5, s1_fwd=3.7,
    alpha_stall_back=-34.5, s1_back=7.0,
    cy_beta=-0.35, cn_beta=0.12, cl_beta=-0.08,
    cm_0=0.0, cm_alpha=-0.05,
    cp_0=0.23, cp_alpha=-0.03,
    cg=0.40, cp_lateral=0.50,
    s=0.39, m=77.5, chord=1.74,
    controls={'dirty': SymmetricControl(d_cd_0=0.03, d_cl_alpha=-0.4, d_alpha_stall_fwd=-4.0)},
)

A5_OUTER_WING_POLAR = Polar(
    name='A5 Outer Wing',
    type='Wingsuit',
    cl_alpha=2.6, alpha_0=-1.0,
    cd_0=0.07, k=0.35,
    cd_n=1.0, cd_n_lateral=0.8,
    alpha_stall_fwd=31.5, s1_fwd=3.7,
    alpha_stall_back=-34.5, s1_back=7.0,
    cy_beta=-0.15, cn_beta=0.02, cl_beta=-0.10,
    cm_0=0.0, cm_alpha=-0.05,
    cp_0=0.25, cp_alpha=-0.03,
    cg=0.40, cp_lateral=0.50,
    s=0.15, m=77.5, chord=0.39,
    controls={'dirty': SymmetricControl(d_cd_0=0.04, d_cl_alpha=-0.5, d_alpha_stall_fwd=-5.0)},
)
