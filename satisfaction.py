import logging

import numpy as np

from utils import add, dot

logger = logging.getLogger(__name__)


def utility(theta_rad, w_self, w_other, x, q):
    """
    Directional utility of allocation x as seen by the other party.

    U = cos(theta) * <w_other, q - x> + sin(theta) * <w_self, x>

    Weights must already be clamped; x is not validated here.

    Args:
        theta_rad (float): Angle in radians.
        w_self (np.array): Self's issue weights.
        w_other (np.array): Other's issue weights.
        x (np.array): Self's share per issue.
        q (np.array): Totals per issue.

    Returns:
        float: Utility, unbounded in sign.
    """
    x_other = add(q, x, -1)
    return float(np.cos(theta_rad) * dot(w_other, x_other) + np.sin(theta_rad) * dot(w_self, x))


def _floor(u, u_min):
    if u_min is None:
        return u
    return np.maximum(u, u_min)


class CandidateUtilities:
    """
    Per-candidate projections computed once for a fixed (q, w_self, w_other).

    Each candidate's utility at any angle is cos(theta) * other_value +
    sin(theta) * self_value, so a sweep over theta never re-enumerates.
    """

    def __init__(self, candidates, q, w_self, w_other):
        self.candidates = np.asarray(candidates)
        q = np.asarray(q, dtype=float)
        # other's valuation of its share, and self's valuation of its share
        self.other_value = (q - self.candidates) @ np.asarray(w_other, dtype=float)
        self.self_value = self.candidates @ np.asarray(w_self, dtype=float)

    def __len__(self):
        return len(self.candidates)

    def utilities(self, theta_rad, u_min=None):
        u = np.cos(theta_rad) * self.other_value + np.sin(theta_rad) * self.self_value
        return _floor(u, u_min)

    def max_utility(self, theta_rad, u_min=None):
        return float(np.max(self.utilities(theta_rad, u_min)))

    def satisfaction(self, theta_rad, beta, u_min=None):
        """Satisfaction of every candidate at once; the maximisers get exactly 1."""
        u = self.utilities(theta_rad, u_min)
        return np.exp(beta * (u - np.max(u)))


def max_utility(theta_rad, w_self, w_other, q, candidates, u_min=None):
    return CandidateUtilities(candidates, q, w_self, w_other).max_utility(theta_rad, u_min)


def satisfaction(theta_rad, w_self, w_other, x, q, beta, candidates, u_min=None, table=None):
    """
    Softmax-style satisfaction S = exp(beta * (U - U_max)) in (0, 1].

    When u_min is set, every candidate's utility and the evaluated
    allocation's utility are floored at u_min before U_max is taken.

    Args:
        theta_rad (float): Angle in radians.
        w_self, w_other (np.array): Clamped weights.
        x (np.array): Allocation under evaluation.
        q (np.array): Totals per issue.
        beta (float): Inverse temperature, >= 0.
        candidates (np.array): Enumerated allocations.
        u_min (float, optional): Utility floor.
        table (CandidateUtilities, optional): Precomputed projections for
            the same candidates, q and weights.

    Returns:
        float: Satisfaction score.
    """
    if table is None:
        table = CandidateUtilities(candidates, q, w_self, w_other)
    u_max = table.max_utility(theta_rad, u_min)
    u = float(_floor(utility(theta_rad, w_self, w_other, x, q), u_min))
    logger.debug("U=%.6f U_max=%.6f over %d candidates", u, u_max, len(table))
    # x is one of the candidates, so any positive gap is rounding noise
    return float(np.exp(beta * min(u - u_max, 0.0)))
