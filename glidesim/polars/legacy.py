"""
Legacy tabulated polars and table interpolation.

The tables are indexed by angle of attack in descending order. Lookups
clamp at both ends and interpolate linearly in between.
"""

from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from archimedes import struct

# Handle imports
try:
    from . import legacy_data as data
except ImportError:
    import legacy_data as data


@struct(frozen=True)
class LegacyPolar:
    """
    Tabulated polar with quadratic-fit summary values.

    Attributes
    ----------
    polarslope, polarclo, polarmindrag : float
        Quadratic drag polar fit CD = slope * (CL - clo)^2 + mindrag
    rangemincl, rangemaxcl : float
        CL range over which the fit is valid
    aoas : tuple
        Angle-of-attack grid (deg), descending
    stallpoint : tuple
        (cl, cd) at each grid angle
    cp : tuple, optional
        Center of pressure (chord fraction) at each grid angle
    """

    name: str
    type: str
    polarslope: float
    polarclo: float
    polarmindrag: float
    rangemincl: float
    rangemaxcl: float
    s: float
    m: float
    aoas: Optional[Tuple[float, ...]] = None
    aoa_indexes: Optional[Tuple[float, ...]] = None
    stallpoint: Optional[Tuple[Tuple[float, float], ...]] = None
    cp: Optional[Tuple[float, ...]] = None
    clstallsep: Optional[float] = None
    cdstallsep: Optional[float] = None
    clstall: Optional[float] = None
    cdstall: Optional[float] = None
    stallmaxdrag: Optional[float] = None

    @property
    def has_tables(self) -> bool:
        return self.aoas is not None and self.stallpoint is not None


def aoa_to_index(alpha_deg: float, aoas: Sequence[float]) -> Tuple[int, int, float]:
    """
    Bracketing table indexes and blend weight for an angle of attack.

    Returns (bottom, top, t) with value = v[bottom] * (1 - t) + v[top] * t.
    """
    last = len(aoas) - 1
    if alpha_deg <= aoas[last]:
        return last, last, 1.0
    if alpha_deg >= aoas[0]:
        return 0, 0, 0.0
    bottom = next(i for i, a in enumerate(aoas) if alpha_deg > a)
    top = bottom - 1
    t = (alpha_deg - aoas[bottom]) / (aoas[top] - aoas[bottom])
    return bottom, top, t


def interpolate_coefficients(index: Tuple[int, int, float],
                             stallpoint: Sequence[Tuple[float, float]]) -> Tuple[float, float]:
    bottom, top, t = index
    cl = stallpoint[bottom][0] * (1 - t) + stallpoint[top][0] * t
    cd = stallpoint[bottom][1] * (1 - t) + stallpoint[top][1] * t
    return cl, cd


def interpolate_cp(index: Tuple[int, int, float], cp: Sequence[float]) -> float:
    bottom, top, t = index
    return cp[bottom] * (1 - t) + cp[top] * t


def get_legacy_coefficients(alpha_deg: float, polar: LegacyPolar) -> Dict[str, float]:
    """
    CL, CD and CP from the tables at an angle of attack (deg).

    Polars without tables return zero coefficients and CP 0.4.
    """
    if not polar.has_tables:
        return {'cl': 0.0, 'cd': 0.0, 'cp': 0.4}
    index = aoa_to_index(alpha_deg, polar.aoas)
    cl, cd = interpolate_coefficients(index, polar.stallpoint)
    cp = interpolate_cp(index, polar.cp) if polar.cp is not None else 0.4
    return {'cl': float(cl), 'cd': float(cd), 'cp': float(cp)}


def legacy_table(polar: LegacyPolar) -> np.ndarray:
    """Tables as an array with columns (alpha, cl, cd, cp)."""
    if not polar.has_tables:
        return np.zeros((0, 4))
    cp = polar.cp if polar.cp is not None else [0.4] * len(polar.aoas)
    return np.column_stack([polar.aoas, np.asarray(polar.stallpoint), cp])


AURAFIVE_LEGACY = LegacyPolar(
    name='Aura 5',
    type='Wingsuit',
    polarslope=0.402096647,
    polarclo=0.078987854,
    polarmindrag=0.101386726,
    rangemincl=0.000679916,
    rangemaxcl=0.950065434,
    s=2.0,
    m=77.5,
    aoas=tuple(data.AURAFIVE_AOAS),
    aoa_indexes=tuple(data.AURAFIVE_AOA_INDEXES),
    stallpoint=tuple(data.AURAFIVE_STALLPOINT),
    cp=tuple(data.AURAFIVE_CP),
)

IBEXUL_LEGACY = LegacyPolar(
    name='Ibex UL',
    type='Canopy',
    polarslope=1.6934221058100165,
    polarclo=0.35823772469396875,
    polarmindrag=0.19703077949220782,
    rangemincl=0.27644921307405346,
    rangemaxcl=0.975070024796286,
    s=20.439,
    m=77.5,
    aoas=tuple(data.IBEX_AOAS),
    aoa_indexes=tuple(data.IBEX_AOA_INDEXES),
    stallpoint=tuple(data.IBEX_STALLPOINT),
    cp=tuple(data.IBEX_CP),
)

SLICKSIN_LEGACY = LegacyPolar(
    name='slicksinangles',
    type='Slick',
    polarslope=0.7,
    polarclo=0.0,
    polarmindrag=0.08,
    rangemincl=0.0597,
    rangemaxcl=0.128,
    s=0.5,
    m=77.5,
    aoas=tuple(data.SLICKSIN_AOAS),
    aoa_indexes=tuple(data.SLICKSIN_AOA_INDEXES),
    stallpoint=tuple(data.SLICKSIN_STALLPOINT),
    cp=tuple(data.SLICKSIN_CP),
    clstallsep=0.0597,
    cdstallsep=0.0823,
    clstall=0.128,
    cdstall=0.16,
    stallmaxdrag=0.266,
)

CARAVAN_LEGACY = LegacyPolar(
    name='Caravan',
    type='Airplane',
    polarslope=0.484813091400691,
    polarclo=0.21896316379267053,
    polarmindrag=0.029467123091668542,
    rangemincl=0.21741522340551012,
    rangemaxcl=0.5258731795206912,
    s=2.0,
    m=77.5,
    aoas=tuple(data.CARAVAN_AOAS),
    aoa_indexes=tuple(data.CARAVAN_AOA_INDEXES),
    stallpoint=tuple(data.CARAVAN_STALLPOINT),
    cp=tuple(data.CARAVAN_CP),
)
