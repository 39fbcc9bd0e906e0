import numpy as np

from errors import ConfigError


def deg2rad(d):
    return np.pi / 180.0 * d


def dot(a, b):
    return float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))


def add(a, b, sign=1):
    """Element-wise a + sign * b."""
    return np.asarray(a, dtype=float) + sign * np.asarray(b, dtype=float)


def clamp01(v):
    return np.clip(v, 0.0, 1.0)


def require_finite(name, value):
    """Raise ConfigError unless every element of value is a finite number."""
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be numeric, got {value!r}") from e
    if not np.all(np.isfinite(arr)):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return value


def clamp_weights(w, w_max, rounding=False):
    """
    Clip a signed weight vector into [-w_max, w_max].

    Args:
        w (Sequence[float]): Raw weights, one per issue.
        w_max (float): Shared non-negative bound.
        rounding (bool): Round to the nearest integer, for integer-stepped
            weight editing. The bound is then floor(w_max) so the result
            stays integral.

    Returns:
        np.ndarray: Clamped weights as floats.
    """
    if not w_max >= 0:
        raise ConfigError(f"w_max must be non-negative, got {w_max}")
    w = np.asarray(w, dtype=float)
    if rounding:
        w = np.rint(w)
        w_max = np.floor(w_max)
    return np.clip(w, -w_max, w_max)


def point_totals(x, q, self_points, opp_points):
    """
    Display totals for a proposal: self's points on x and the opponent's
    points on q - x.

    Returns:
        tuple: (self_total, opponent_total)
    """
    other_share = add(q, x, -1)
    return dot(x, self_points), dot(other_share, opp_points)
