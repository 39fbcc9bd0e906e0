# File: plotting.py
import numpy as np
import matplotlib.pyplot as plt

from config import EMO_COLORS, EMOTION_LABELS


def plot_angle_sweep(rows, ax=None):
    """
    Draw the emotion probability curves of an angle sweep.

    Args:
        rows (Iterable[tuple]): (theta_deg, probabilities) pairs.
        ax (matplotlib.axes.Axes, optional): Target axes; a new figure is made if None.

    Returns:
        matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    rows = list(rows)
    thetas = np.array([th for th, _ in rows])
    for label in EMOTION_LABELS:
        values = np.array([probs[label] for _, probs in rows])
        ax.plot(thetas, values, color=EMO_COLORS[label], linewidth=2, label=label)
    ax.axvline(x=0, color='black', linestyle='--', alpha=0.5)
    ax.set_xlabel('θ (SVO angle, deg)')
    ax.set_ylabel('P_other(E | θ, x, w_self, w_other)')
    ax.set_title("Other's Emotion Likelihood")
    ax.set_xlim([-90, 90])
    ax.set_ylim([0, 1])
    ax.set_xticks(range(-90, 91, 15))
    ax.legend()
    ax.grid(True)
    return ax


def plot_allocation_scatter(points, ax=None, current=None):
    """
    Scatter every allocation at (self value, other value), coloured by its
    dominant emotion.

    Args:
        points (dict): Label -> (k, 2) array, as returned by sweep_allocations.
        ax (matplotlib.axes.Axes, optional): Target axes.
        current (tuple, optional): (self value, other value) of the current proposal.

    Returns:
        matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    for label in EMOTION_LABELS:
        pts = np.asarray(points[label]).reshape(-1, 2)
        ax.scatter(pts[:, 0], pts[:, 1], color=EMO_COLORS[label], s=12, alpha=0.7,
                   label=f"{label} ({len(pts)})")
    if current is not None:
        ax.scatter(current[0], current[1], color='black', marker='*', s=120, label='Proposal')
    ax.set_xlabel('<w_self, x>')
    ax.set_ylabel('<w_other, q - x>')
    ax.set_title('Allocations by Dominant Emotion')
    ax.legend()
    ax.grid(True)
    return ax
