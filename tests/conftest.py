import pytest

from config import BETA, SAD_BAND, TAU1, TAU2

# Reference scenario of the explorer's default state
Q = [7, 5, 5, 5]
X = [3, 2, 2, 1]
W_SELF = [0.6, 0.2, 0.1, 0.1]
W_OTHER = [0.5, -0.2, 0.3, 0.1]


@pytest.fixture
def scenario():
    return dict(w_self=W_SELF, w_other=W_OTHER, q=Q, beta=BETA,
                tau1=TAU1, tau2=TAU2, sad_band=SAD_BAND)
