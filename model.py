"""
Public entry points of the emotion likelihood model.

Every function is pure: it validates its inputs, derives clamped weights and
the allocation space from scratch, and returns fresh values.
"""
import numpy as np

from allocation import enumerate_allocations, validate_allocation, validate_totals
from config import (EPSILON, MAX_CANDIDATES, THETA_MAX, THETA_MIN, THETA_STEP,
                    validate_beta, validate_thresholds)
from emotion_processing import emotion_scores_from_s, scores_to_probs
from errors import ConfigError
from satisfaction import satisfaction
from simulation import AngleSweep
from simulation import sweep_allocations as _sweep_allocations
from utils import clamp_weights, deg2rad, require_finite

__all__ = ["evaluate", "sweep_angle", "sweep_allocations", "clamp_weights",
           "evaluate_params", "sweep_params"]


def _prepare_weights(w_self, w_other, q, w_max):
    n = len(q)
    w_self = np.asarray(w_self, dtype=float)
    w_other = np.asarray(w_other, dtype=float)
    for name, w in (("w_self", w_self), ("w_other", w_other)):
        if w.shape != (n,):
            raise ConfigError(f"{name} has shape {w.shape}, expected ({n},)")
    if w_max is not None:
        w_self = clamp_weights(w_self, w_max)
        w_other = clamp_weights(w_other, w_max)
    require_finite("w_self", w_self)
    require_finite("w_other", w_other)
    return w_self, w_other


def _check(q, beta, tau1, tau2, sad_band, u_min=None):
    q = validate_totals(q)
    if u_min is not None:
        require_finite("u_min", u_min)
    validate_beta(beta)
    validate_thresholds(tau1, tau2, sad_band)
    return q


def evaluate(theta_deg, w_self, w_other, x, q, beta, tau1, tau2, sad_band,
             u_min=None, w_max=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
    """
    Emotion probabilities of the other party for one proposal at one angle.

    Args:
        theta_deg (float): Angle in degrees.
        w_self, w_other (Sequence[float]): Issue weights. Clamped to
            [-w_max, w_max] when w_max is given, otherwise used as-is.
        x (Sequence[int]): Self's share per issue.
        q (Sequence[int]): Totals per issue.
        beta (float): Inverse temperature, >= 0.
        tau1, tau2, sad_band (float): Emotion thresholds.
        u_min (float, optional): Utility floor.

    Returns:
        dict: {"Anger", "Sad", "Neutral", "Joy"} -> probability.
    """
    q = _check(q, beta, tau1, tau2, sad_band, u_min)
    require_finite("theta_deg", theta_deg)
    x = validate_allocation(x, q)
    w_self, w_other = _prepare_weights(w_self, w_other, q, w_max)
    candidates = enumerate_allocations(q, max_candidates)
    S = satisfaction(deg2rad(theta_deg), w_self, w_other, x, q, beta, candidates, u_min)
    return scores_to_probs(emotion_scores_from_s(S, tau1, tau2, sad_band), eps)


def sweep_angle(w_self, w_other, x, q, beta, tau1, tau2, sad_band,
                theta_min=THETA_MIN, theta_max=THETA_MAX, theta_step=THETA_STEP,
                u_min=None, w_max=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
    """Probability curve of a fixed proposal over the angle grid, as a list of (theta, probs)."""
    return list(angle_sweep(w_self, w_other, x, q, beta, tau1, tau2, sad_band,
                            theta_min, theta_max, theta_step,
                            u_min=u_min, w_max=w_max, eps=eps, max_candidates=max_candidates))


def angle_sweep(w_self, w_other, x, q, beta, tau1, tau2, sad_band,
                theta_min=THETA_MIN, theta_max=THETA_MAX, theta_step=THETA_STEP,
                u_min=None, w_max=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
    """Lazy, restartable form of sweep_angle."""
    q = _check(q, beta, tau1, tau2, sad_band, u_min)
    w_self, w_other = _prepare_weights(w_self, w_other, q, w_max)
    return AngleSweep(w_self, w_other, x, q, beta, tau1, tau2, sad_band,
                      theta_min, theta_max, theta_step,
                      u_min=u_min, eps=eps, max_candidates=max_candidates)


def sweep_allocations(w_self, w_other, q, theta_deg, beta, tau1, tau2, sad_band,
                      u_min=None, w_max=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
    """Point cloud of all allocations, split by dominant emotion at theta_deg."""
    q = _check(q, beta, tau1, tau2, sad_band, u_min)
    require_finite("theta_deg", theta_deg)
    w_self, w_other = _prepare_weights(w_self, w_other, q, w_max)
    return _sweep_allocations(w_self, w_other, q, theta_deg, beta, tau1, tau2, sad_band,
                              u_min=u_min, eps=eps, max_candidates=max_candidates)


def _clamped(params):
    return (clamp_weights(params.w_self, params.w_max, params.rounding),
            clamp_weights(params.w_other, params.w_max, params.rounding))


def evaluate_params(params, theta_deg, x=None):
    """evaluate() driven by a ModelParams; x defaults to params.x."""
    w_self, w_other = _clamped(params)
    return evaluate(theta_deg, w_self, w_other, params.x if x is None else x, params.q,
                    params.beta, params.tau1, params.tau2, params.sad_band,
                    u_min=params.u_min, eps=params.eps)


def sweep_params(params, x=None):
    w_self, w_other = _clamped(params)
    return sweep_angle(w_self, w_other, params.x if x is None else x, params.q,
                       params.beta, params.tau1, params.tau2, params.sad_band,
                       params.theta_min, params.theta_max, params.theta_step,
                       u_min=params.u_min, eps=params.eps)
