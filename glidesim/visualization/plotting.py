"""
Standard Plotting Functions

Polar sweep charts (coefficients, drag polar, glide ratio, sustained-speed
polar), trajectory and state histories from simulate_history, and trim
envelopes from GlideTrimSolver results.
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.figure import Figure


def _finish(fig: Figure, save_path: Optional[str]) -> Figure:
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    return fig


def plot_polar_sweep(
    sweeps: Dict[str, pd.DataFrame],
    title: str = "Polar Sweep",
    figsize: Tuple[float, float] = (12, 9),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot CL and CD vs alpha, the drag polar, and L/D vs alpha.

    Parameters
    ----------
    sweeps : Dict[str, pd.DataFrame]
        Sweep tables keyed by legend label, each with columns
        'alpha', 'cl', 'cd' and 'ld' (sweep_polar, sweep_segments or
        sweep_legacy_polar output)
    title : str, optional
        Main plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    fig, axes = plt.subplots(2, 2, figsize=figsize)
    ax_cl, ax_cd, ax_polar, ax_ld = axes.flat

    for label, table in sweeps.items():
        ax_cl.plot(table['alpha'], table['cl'], linewidth=1.5, label=label)
        ax_cd.plot(table['alpha'], table['cd'], linewidth=1.5, label=label)
        ax_polar.plot(table['cd'], table['cl'], linewidth=1.5, label=label)
        ax_ld.plot(table['alpha'], table['ld'], linewidth=1.5, label=label)

    ax_cl.set_ylabel('CL', fontsize=11)
    ax_cl.set_title('Lift Coefficient', fontsize=11, fontweight='bold')
    ax_cd.set_ylabel('CD', fontsize=11)
    ax_cd.set_title('Drag Coefficient', fontsize=11, fontweight='bold')
    ax_ld.set_ylabel('L/D', fontsize=11)
    ax_ld.set_title('Glide Ratio', fontsize=11, fontweight='bold')
    for ax in (ax_cl, ax_cd, ax_ld):
        ax.set_xlabel('Alpha (deg)', fontsize=11)

    ax_polar.set_xlabel('CD', fontsize=11)
    ax_polar.set_ylabel('CL', fontsize=11)
    ax_polar.set_title('Drag Polar', fontsize=11, fontweight='bold')

    for ax in axes.flat:
        ax.grid(True, alpha=0.3)
        if sweeps:
            ax.legend(loc='best')

    fig.suptitle(title, fontsize=13, fontweight='bold')
    return _finish(fig, save_path)


def plot_speed_polar(
    sweeps: Dict[str, pd.DataFrame],
    title: str = "Sustained Speed Polar",
    figsize: Tuple[float, float] = (9, 7),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot sustained vertical speed against sustained horizontal speed.

    Vertical speed is drawn positive down, so the curve reads like a
    skydiver's speed polar (horizontal speed right, sink rate down).

    Parameters
    ----------
    sweeps : Dict[str, pd.DataFrame]
        Sweep tables with 'vxs' and 'vys' columns (m/s)
    """
    fig, ax = plt.subplots(figsize=figsize)

    for label, table in sweeps.items():
        ax.plot(table['vxs'], table['vys'], linewidth=2, label=label)

    ax.set_xlabel('Horizontal speed (m/s)', fontsize=11)
    ax.set_ylabel('Vertical speed (m/s)', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.invert_yaxis()
    ax.grid(True, alpha=0.3)
    if sweeps:
        ax.legend(loc='best')

    return _finish(fig, save_path)


def plot_trajectory_3d(
    history: pd.DataFrame,
    title: str = "3D Flight Trajectory",
    show_markers: bool = True,
    marker_interval: int = 50,
    figsize: Tuple[float, float] = (10, 8),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot 3D flight trajectory from a simulate_history table.

    Parameters
    ----------
    history : pd.DataFrame
        Trajectory with NED columns 'x', 'y', 'z'
    title : str, optional
        Plot title
    show_markers : bool, optional
        Whether to show position markers along trajectory
    marker_interval : int, optional
        Interval between markers (if show_markers=True)
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure (if None, figure is not saved)

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection='3d')

    north = history['x'].to_numpy()
    east = history['y'].to_numpy()
    altitude = -history['z'].to_numpy()

    ax.plot(east, north, altitude, 'b-', linewidth=2, label='Trajectory')

    if show_markers and len(history) > marker_interval:
        idx = np.arange(0, len(history), marker_interval)
        ax.scatter(east[idx], north[idx], altitude[idx], c='r', marker='o', s=30, label='Waypoints')

    ax.scatter(east[0], north[0], altitude[0], c='g', marker='o', s=100, label='Start', edgecolors='k')
    ax.scatter(east[-1], north[-1], altitude[-1], c='r', marker='s', s=100, label='End', edgecolors='k')

    ax.set_xlabel('East (m)', fontsize=11)
    ax.set_ylabel('North (m)', fontsize=11)
    ax.set_zlabel('Altitude (m)', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.legend(loc='best')

    # Equal aspect ratio
    spans = np.array([np.ptp(east), np.ptp(north), np.ptp(altitude)])
    half = max(spans.max() / 2.0, 1.0)
    for setter, data in ((ax.set_xlim, east), (ax.set_ylim, north), (ax.set_zlim, altitude)):
        mid = (data.max() + data.min()) * 0.5
        setter(mid - half, mid + half)

    return _finish(fig, save_path)


def plot_glide_profile(
    history: pd.DataFrame,
    title: str = "Glide Profile",
    figsize: Tuple[float, float] = (10, 5),
    save_path: Optional[str] = None
) -> Figure:
    """Altitude against horizontal distance flown, equal axis scale."""
    distance = np.hypot(history['x'] - history['x'].iloc[0], history['y'] - history['y'].iloc[0])

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(distance, history['altitude'], 'b-', linewidth=2)
    ax.set_xlabel('Distance (m)', fontsize=11)
    ax.set_ylabel('Altitude (m)', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)

    return _finish(fig, save_path)


def plot_states_vs_time(
    history: pd.DataFrame,
    title: str = "State Variables vs Time",
    figsize: Tuple[float, float] = (12, 12),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot position, body velocity, Euler angles, body rates and flow
    angles from a simulate_history table.

    Parameters
    ----------
    history : pd.DataFrame
        Columns 't', 'x'..'r', 'airspeed', 'alpha_deg', 'altitude'
    title : str, optional
        Main plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    t = history['t']
    fig, axes = plt.subplots(5, 1, figsize=figsize, sharex=True)

    panels = [
        ('Position', 'Position (m)', [('x', 'North', 1.0), ('y', 'East', 1.0), ('altitude', 'Altitude', 1.0)]),
        ('Body Frame Velocity', 'Velocity (m/s)', [('u', 'u (Forward)', 1.0), ('v', 'v (Right)', 1.0),
                                                   ('w', 'w (Down)', 1.0)]),
        ('Euler Angles', 'Angle (deg)', [('phi', 'Roll', np.degrees(1.0)), ('theta', 'Pitch', np.degrees(1.0)),
                                         ('psi', 'Yaw', np.degrees(1.0))]),
        ('Angular Rates', 'Rate (deg/s)', [('p', 'p (Roll rate)', np.degrees(1.0)),
                                           ('q', 'q (Pitch rate)', np.degrees(1.0)),
                                           ('r', 'r (Yaw rate)', np.degrees(1.0))]),
    ]
    colors = ('r-', 'g-', 'b-')

    for ax, (panel_title, ylabel, series) in zip(axes, panels):
        for (column, label, scale), style in zip(series, colors):
            ax.plot(t, history[column] * scale, style, label=label, linewidth=1.5)
        ax.set_ylabel(ylabel, fontsize=11)
        ax.set_title(panel_title, fontsize=11, fontweight='bold')
        ax.legend(loc='best', ncol=3)
        ax.grid(True, alpha=0.3)

    ax = axes[4]
    ax.plot(t, history['airspeed'], 'k-', label='Airspeed (m/s)', linewidth=1.5)
    ax.plot(t, history['alpha_deg'], 'm-', label='Alpha (deg)', linewidth=1.5)
    ax.set_title('Airspeed and Angle of Attack', fontsize=11, fontweight='bold')
    ax.set_xlabel('Time (s)', fontsize=11)
    ax.legend(loc='best', ncol=2)
    ax.grid(True, alpha=0.3)

    fig.suptitle(title, fontsize=13, fontweight='bold')
    return _finish(fig, save_path)


def plot_trim_envelope(
    trim_results: List[Dict[str, Any]],
    x_var: str,
    y_var: str,
    title: str = "Trim Envelope",
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
    figsize: Tuple[float, float] = (10, 8),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot one trim variable against another across several trim solutions.

    Parameters
    ----------
    trim_results : List[Dict[str, Any]]
        GlideTrimSolver info dicts ('airspeed', 'alpha_deg', 'theta_deg',
        'gamma_deg', 'glide_ratio', 'sink_rate', ...), optionally with
        extra entries such as the control setting that was swept
    x_var, y_var : str
        Keys to plot
    """
    x_data = np.array([result.get(x_var, np.nan) for result in trim_results], dtype=float)
    y_data = np.array([result.get(y_var, np.nan) for result in trim_results], dtype=float)

    valid = ~(np.isnan(x_data) | np.isnan(y_data))
    x_data = x_data[valid]
    y_data = y_data[valid]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(x_data, y_data, 'bo-', linewidth=2, markersize=6)
    ax.grid(True, alpha=0.3)

    if xlabel is None:
        xlabel = _trim_label(x_var)
    if ylabel is None:
        ylabel = _trim_label(y_var)

    ax.set_xlabel(xlabel, fontsize=11)
    ax.set_ylabel(ylabel, fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')

    return _finish(fig, save_path)


def _trim_label(var: str) -> str:
    if var.endswith('_deg'):
        return var[:-4].replace('_', ' ').title() + ' (deg)'
    label = var.replace('_', ' ').title()
    if var in ('airspeed', 'sink_rate'):
        label += ' (m/s)'
    return label


if __name__ == "__main__":
    from glidesim.analysis.sweeps import SweepConfig, sweep_polar, sweep_legacy_polar
    from glidesim.polars.registry import get_polar, get_legacy_polar

    config = SweepConfig(min_alpha=-5.0, max_alpha=60.0, step=0.5)
    sweeps = {
        'Aura 5': sweep_polar(get_polar('aurafive'), config),
        'Aura 5 (tables)': sweep_legacy_polar(get_legacy_polar('aurafive'), config),
    }
    plot_polar_sweep(sweeps, title="Aura 5 Wingsuit", save_path='aurafive_polar.png')
    plot_speed_polar(sweeps, save_path='aurafive_speed_polar.png')
    print("Saved aurafive_polar.png and aurafive_speed_polar.png")
