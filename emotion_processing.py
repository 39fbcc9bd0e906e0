# emotion_processing.py
import numpy as np

from config import EMOTION_LABELS, EPSILON, TIE_BREAK_ORDER
from utils import clamp01


def _out(v):
    return float(v) if np.ndim(v) == 0 else v


def emotion_scores_from_s(S, tau1, tau2, sad_band):
    """
    Piecewise-linear, unnormalised emotion intensities for a satisfaction S.

    Anger ramps up below tau1, Sad is a narrow spike centred on tau1,
    Neutral is a triangle over (tau1, tau2) and Joy ramps up above tau2.
    The scores are not exclusive: near tau1 both Anger and Sad can be
    non-zero. S may be a scalar or a numpy array.

    Args:
        S (float | np.array): Satisfaction in (0, 1].
        tau1 (float): Anger/Neutral boundary, 0 < tau1 < tau2.
        tau2 (float): Neutral/Joy boundary, tau2 < 1.
        sad_band (float): Half width of the Sad spike, > 0.

    Returns:
        dict: Label -> score in [0, 1].
    """
    S = np.asarray(S, dtype=float)
    anger = clamp01((tau1 - S) / tau1)
    dist = np.abs(S - tau1)
    sad = np.where(dist <= sad_band, 1 - dist / sad_band, 0.0)
    mid = (tau1 + tau2) / 2
    width = (tau2 - tau1) / 2
    inside = (S > tau1) & (S < tau2)
    neutral = np.where(inside, clamp01(1 - np.abs(S - mid) / width), 0.0)
    joy = clamp01((S - tau2) / (1 - tau2))
    return {
        "Anger": _out(anger),
        "Sad": _out(sad),
        "Neutral": _out(neutral),
        "Joy": _out(joy),
    }


def scores_to_probs(scores, eps=EPSILON):
    """
    Normalise emotion scores into a probability distribution.

    eps is added to every score, so all probabilities are strictly positive
    and all-zero scores give the uniform distribution.
    """
    total = sum(scores[k] + eps for k in EMOTION_LABELS)
    return {k: _out((scores[k] + eps) / total) for k in EMOTION_LABELS}


def dominant_emotion(probs):
    """
    Most probable label; exact ties go to the earlier label in
    TIE_BREAK_ORDER (Joy, Neutral, Sad, Anger).
    """
    best = TIE_BREAK_ORDER[0]
    for label in TIE_BREAK_ORDER[1:]:
        if probs[label] > probs[best]:
            best = label
    return best


def dominant_emotions(probs):
    """Vectorised dominant_emotion over arrays of probabilities."""
    stacked = np.stack([np.asarray(probs[k]) for k in TIE_BREAK_ORDER])
    # argmax returns the first maximum, which is the tie-break priority
    idx = np.argmax(stacked, axis=0)
    return np.asarray(TIE_BREAK_ORDER)[idx]
