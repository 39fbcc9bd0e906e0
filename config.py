import logging
import math
import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from errors import ConfigError

logger = logging.getLogger(__name__)

# Emotion labels in output order, and the priority used to break argmax ties
EMOTION_LABELS = ("Anger", "Sad", "Neutral", "Joy")
TIE_BREAK_ORDER = ("Joy", "Neutral", "Sad", "Anger")

EMO_COLORS = {
    "Anger": "#d62728",
    "Sad": "#9467bd",
    "Neutral": "#7f7f7f",
    "Joy": "#2ca02c",
}

# Issue totals and the proposed split (x is self's share, q - x is other's)
Q = (7, 5, 5, 5)
X = (3, 2, 2, 1)

# Signed issue weights, clipped into [-W_MAX, W_MAX] before use
W_SELF = (0.6, 0.2, 0.1, 0.1)
W_OTHER = (0.5, -0.2, 0.3, 0.1)
W_MAX = 4.0

# Per-issue display points for the totals table
SELF_POINTS = (2, 1, 0, -1)
OPP_POINTS = (2, 0, -1, 1)

# Model parameters
BETA = 0.8        # inverse temperature of the satisfaction transform
TAU1 = 0.4        # Anger <-> Neutral boundary
TAU2 = 0.7        # Neutral <-> Joy boundary
SAD_BAND = 0.02   # half width of the Sad spike around TAU1
EPSILON = 1e-9    # smoothing added to every score before normalising

# Angle grid (degrees)
THETA_MIN = -90.0
THETA_MAX = 90.0
THETA_STEP = 1.0

# Largest allocation space we are willing to enumerate
MAX_CANDIDATES = 100_000

ENV_PREFIX = "ELE_"


def validate_thresholds(tau1, tau2, sad_band):
    """
    Reject threshold settings that would divide by zero or invert a range
    in the emotion scorer.
    """
    if not 0 < tau1 < 1:
        raise ConfigError(f"tau1 must be in (0, 1), got {tau1}")
    if not 0 < tau2 < 1:
        raise ConfigError(f"tau2 must be in (0, 1), got {tau2}")
    if tau1 >= tau2:
        raise ConfigError(f"tau1 must be smaller than tau2, got tau1={tau1}, tau2={tau2}")
    if not sad_band > 0:
        raise ConfigError(f"sad_band must be positive, got {sad_band}")


def validate_beta(beta):
    if not beta >= 0 or math.isinf(beta):
        raise ConfigError(f"beta must be a finite non-negative number, got {beta}")


def format_validation_error(error: ValidationError) -> str:
    """Format a ValidationError into a user-friendly string."""
    error_messages = []
    for err in error.errors():
        location = " -> ".join(str(loc) for loc in err['loc']) or "params"
        error_messages.append(f"Error in {location}: {err['msg']}")
    return "\n".join(error_messages)


class ModelParams(BaseModel):
    """
    Immutable parameter set for one evaluation request.

    A new instance is built for every change of input; nothing in the model
    keeps a reference to a previous one. Vector fields also accept
    comma-separated strings, as they come from the environment.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    q: Tuple[int, ...] = Q
    x: Tuple[int, ...] = X
    w_self: Tuple[float, ...] = W_SELF
    w_other: Tuple[float, ...] = W_OTHER
    w_max: float = Field(W_MAX, ge=0)
    beta: float = Field(BETA, ge=0)
    tau1: float = Field(TAU1, gt=0, lt=1)
    tau2: float = Field(TAU2, gt=0, lt=1)
    sad_band: float = Field(SAD_BAND, gt=0)
    u_min: Optional[float] = None
    eps: float = Field(EPSILON, gt=0)
    theta_min: float = THETA_MIN
    theta_max: float = THETA_MAX
    theta_step: float = Field(THETA_STEP, gt=0)
    rounding: bool = False

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed:\n{format_validation_error(e)}") from e

    @field_validator("q", "x", "w_self", "w_other", mode="before")
    @classmethod
    def split_vector(cls, v):
        if isinstance(v, str):
            return tuple(part.strip() for part in v.split(",") if part.strip())
        return v

    @model_validator(mode="after")
    def check_shapes_and_order(self):
        n = len(self.q)
        if n == 0:
            raise ValueError("q must contain at least one issue")
        if any(v < 0 for v in self.q):
            raise ValueError(f"q must be non-negative, got {self.q}")
        for name in ("x", "w_self", "w_other"):
            if len(getattr(self, name)) != n:
                raise ValueError(f"{name} has length {len(getattr(self, name))}, expected {n}")
        if self.tau1 >= self.tau2:
            raise ValueError(f"tau1 must be smaller than tau2, got tau1={self.tau1}, tau2={self.tau2}")
        if self.theta_min > self.theta_max:
            raise ValueError("theta_min must not exceed theta_max")
        return self

    def with_updates(self, **changes):
        return ModelParams(**{**self.model_dump(), **changes})

    @classmethod
    def reset(cls):
        """Default parameters of the explorer."""
        return cls()


_ENV_FIELDS = ("q", "x", "w_self", "w_other", "w_max", "beta", "tau1", "tau2",
               "sad_band", "u_min", "theta_step", "rounding")


def load_params(env=None):
    """
    Build a ModelParams from the defaults above, overridden by ELE_*
    environment variables (a .env file in the working directory is loaded
    first). Parsing of the raw strings is left to ModelParams.

    Args:
        env (Mapping[str, str], optional): Variables to read instead of os.environ.

    Returns:
        ModelParams: Validated parameter set.
    """
    if env is None:
        load_dotenv()
        env = os.environ
    overrides = {}
    for field in _ENV_FIELDS:
        raw = env.get(ENV_PREFIX + field.upper())
        if raw is None or raw.strip() == "":
            continue
        overrides[field] = raw
    if overrides:
        logger.info("Parameter overrides from environment: %s", sorted(overrides))
    return ModelParams(**overrides)
