import numpy as np
import pytest
from hypothesis import given, strategies as st

from config import EMOTION_LABELS
from emotion_processing import (dominant_emotion, dominant_emotions,
                                emotion_scores_from_s, scores_to_probs)

TAU1, TAU2, BAND = 0.4, 0.7, 0.02


def test_scores_at_tau1():
    g = emotion_scores_from_s(TAU1, TAU1, TAU2, BAND)
    assert g["Sad"] == 1.0
    assert g["Anger"] == 0.0
    assert g["Neutral"] == 0.0
    assert g["Joy"] == 0.0


def test_scores_at_tau2():
    g = emotion_scores_from_s(TAU2, TAU1, TAU2, BAND)
    assert g["Joy"] == 0.0
    assert g["Neutral"] == 0.0


def test_full_satisfaction_is_joy():
    g = emotion_scores_from_s(1.0, TAU1, TAU2, BAND)
    assert g == {"Anger": 0.0, "Sad": 0.0, "Neutral": 0.0, "Joy": 1.0}


def test_neutral_peaks_at_midpoint():
    mid = (TAU1 + TAU2) / 2
    assert emotion_scores_from_s(mid, TAU1, TAU2, BAND)["Neutral"] == pytest.approx(1.0)
    assert emotion_scores_from_s(TAU1 + 0.075, TAU1, TAU2, BAND)["Neutral"] == pytest.approx(0.5)


def test_anger_ramp():
    assert emotion_scores_from_s(0.2, TAU1, TAU2, BAND)["Anger"] == pytest.approx(0.5)
    assert emotion_scores_from_s(1e-12, TAU1, TAU2, BAND)["Anger"] == pytest.approx(1.0)


def test_anger_and_sad_overlap_below_tau1():
    g = emotion_scores_from_s(TAU1 - 0.01, TAU1, TAU2, BAND)
    assert g["Anger"] > 0
    assert g["Sad"] == pytest.approx(0.5)


def test_sad_band_edges():
    assert emotion_scores_from_s(TAU1 + 0.03, TAU1, TAU2, BAND)["Sad"] == 0.0
    assert emotion_scores_from_s(TAU1 - 0.03, TAU1, TAU2, BAND)["Sad"] == 0.0


def test_array_input_matches_scalar():
    S = np.array([0.1, TAU1, 0.55, 0.85, 1.0])
    g = emotion_scores_from_s(S, TAU1, TAU2, BAND)
    for i, s in enumerate(S):
        single = emotion_scores_from_s(float(s), TAU1, TAU2, BAND)
        for k in EMOTION_LABELS:
            assert g[k][i] == pytest.approx(single[k])


def test_zero_scores_give_uniform():
    p = scores_to_probs({k: 0.0 for k in EMOTION_LABELS})
    for k in EMOTION_LABELS:
        assert p[k] == pytest.approx(0.25)


@given(
    st.floats(min_value=1e-6, max_value=1.0),
    st.floats(min_value=0.05, max_value=0.45),
    st.floats(min_value=0.55, max_value=0.95),
    st.floats(min_value=0.001, max_value=0.1),
)
def test_probabilities_form_a_simplex(S, tau1, tau2, band):
    p = scores_to_probs(emotion_scores_from_s(S, tau1, tau2, band))
    assert list(p) == list(EMOTION_LABELS)
    assert sum(p.values()) == pytest.approx(1.0, abs=1e-6)
    assert all(0 < v < 1 for v in p.values())


def test_tie_break_priority():
    uniform = {k: 0.25 for k in EMOTION_LABELS}
    assert dominant_emotion(uniform) == "Joy"
    assert dominant_emotion({"Anger": 0.4, "Sad": 0.4, "Neutral": 0.1, "Joy": 0.1}) == "Sad"
    assert dominant_emotion({"Anger": 0.7, "Sad": 0.1, "Neutral": 0.1, "Joy": 0.1}) == "Anger"


def test_vectorised_dominant_matches_scalar():
    probs = {
        "Anger": np.array([0.25, 0.4, 0.7]),
        "Sad": np.array([0.25, 0.4, 0.1]),
        "Neutral": np.array([0.25, 0.1, 0.1]),
        "Joy": np.array([0.25, 0.1, 0.1]),
    }
    assert dominant_emotions(probs).tolist() == ["Joy", "Sad", "Anger"]
