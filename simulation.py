import logging
import math

import numpy as np

from allocation import enumerate_allocations, validate_allocation
from config import EMOTION_LABELS, EPSILON, MAX_CANDIDATES, THETA_MAX, THETA_MIN, THETA_STEP
from emotion_processing import dominant_emotions, emotion_scores_from_s, scores_to_probs
from errors import ConfigError
from satisfaction import CandidateUtilities, satisfaction
from utils import deg2rad, require_finite

logger = logging.getLogger(__name__)


def theta_grid(theta_min=THETA_MIN, theta_max=THETA_MAX, theta_step=THETA_STEP):
    """Inclusive grid theta_min, theta_min + step, ... <= theta_max (degrees)."""
    require_finite("theta_min", theta_min)
    require_finite("theta_max", theta_max)
    if not theta_step > 0:
        raise ConfigError(f"theta_step must be positive, got {theta_step}")
    if theta_min > theta_max:
        raise ConfigError(f"theta_min {theta_min} exceeds theta_max {theta_max}")
    n = int(math.floor((theta_max - theta_min) / theta_step + 1e-9)) + 1
    return [theta_min + k * theta_step for k in range(n)]


class AngleSweep:
    """
    Emotion probabilities of a fixed allocation over a grid of angles.

    Iterating yields (theta_deg, probabilities) pairs, computed on demand.
    The allocation space is enumerated once at construction; iterating
    again restarts the sweep from theta_min.
    """

    def __init__(self, w_self, w_other, x, q, beta, tau1, tau2, sad_band,
                 theta_min=THETA_MIN, theta_max=THETA_MAX, theta_step=THETA_STEP,
                 u_min=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
        self.w_self = np.asarray(w_self, dtype=float)
        self.w_other = np.asarray(w_other, dtype=float)
        self.q = np.asarray(q)
        self.x = validate_allocation(x, q)
        self.beta = beta
        self.tau1 = tau1
        self.tau2 = tau2
        self.sad_band = sad_band
        self.u_min = u_min
        self.eps = eps
        self.thetas = theta_grid(theta_min, theta_max, theta_step)
        candidates = enumerate_allocations(q, max_candidates)
        self.table = CandidateUtilities(candidates, q, self.w_self, self.w_other)
        logger.debug("Angle sweep over %d angles, %d candidates", len(self.thetas), len(self.table))

    def __len__(self):
        return len(self.thetas)

    def __iter__(self):
        for th in self.thetas:
            S = satisfaction(deg2rad(th), self.w_self, self.w_other, self.x, self.q,
                             self.beta, self.table.candidates, self.u_min, table=self.table)
            scores = emotion_scores_from_s(S, self.tau1, self.tau2, self.sad_band)
            yield th, scores_to_probs(scores, self.eps)


def sweep_allocations(w_self, w_other, q, theta_deg, beta, tau1, tau2, sad_band,
                      u_min=None, eps=EPSILON, max_candidates=MAX_CANDIDATES):
    """
    Classify every allocation of q by its most probable emotion at one angle.

    Each allocation x becomes the point (<w_self, x>, <w_other, q - x>)
    under its dominant label.

    Returns:
        dict: Label -> np.ndarray of shape (k, 2); every label is present.
    """
    candidates = enumerate_allocations(q, max_candidates)
    table = CandidateUtilities(candidates, q, w_self, w_other)
    S = table.satisfaction(deg2rad(theta_deg), beta, u_min)
    probs = scores_to_probs(emotion_scores_from_s(S, tau1, tau2, sad_band), eps)
    labels = dominant_emotions(probs)
    points = np.column_stack([table.self_value, table.other_value])
    result = {label: points[labels == label] for label in EMOTION_LABELS}
    logger.debug("Classified %d allocations at theta=%s: %s", len(table), theta_deg,
                 {k: len(v) for k, v in result.items()})
    return result
