import logging
from math import prod

import numpy as np

from config import MAX_CANDIDATES
from errors import AllocationError, CandidateLimitError, ConfigError

logger = logging.getLogger(__name__)


def validate_totals(q):
    """
    Check that q is a non-empty vector of non-negative integers.

    Returns:
        np.ndarray: q as an integer array.
    """
    arr = np.asarray(q)
    if arr.ndim != 1 or arr.size == 0:
        raise ConfigError(f"q must be a non-empty 1-d vector, got {q!r}")
    if not np.issubdtype(arr.dtype, np.number):
        raise ConfigError(f"q must be numeric, got {q!r}")
    if not np.all(np.equal(np.mod(arr, 1), 0)):
        raise ConfigError(f"q must contain integers, got {q!r}")
    arr = arr.astype(int)
    if np.any(arr < 0):
        raise ConfigError(f"q must be non-negative, got {q!r}")
    return arr


def validate_allocation(x, q):
    """
    Check 0 <= x_i <= q_i for every issue.

    Returns:
        np.ndarray: x as an integer array.
    """
    q = validate_totals(q)
    arr = np.asarray(x)
    if arr.shape != q.shape:
        raise AllocationError(f"allocation {x!r} does not match {q.size} issues")
    if not np.issubdtype(arr.dtype, np.number):
        raise AllocationError(f"allocation must be numeric, got {x!r}")
    if not np.all(np.equal(np.mod(arr, 1), 0)):
        raise AllocationError(f"allocation must contain integers, got {x!r}")
    arr = arr.astype(int)
    bad = np.flatnonzero((arr < 0) | (arr > q))
    if bad.size:
        i = int(bad[0])
        raise AllocationError(f"x[{i}]={arr[i]} is outside [0, {q[i]}]")
    return arr


def candidate_count(q):
    return prod(int(v) + 1 for v in validate_totals(q))


def enumerate_allocations(q, max_candidates=MAX_CANDIDATES):
    """
    Every allocation with 0 <= x_i <= q_i, as rows of an integer array.

    Rows follow the lexicographic product order with the last issue varying
    fastest, so row 0 is always the origin. The array has prod(q_i + 1) rows.

    Args:
        q (Sequence[int]): Totals per issue.
        max_candidates (int, optional): Refuse to enumerate more rows than this.
            None disables the check.

    Returns:
        np.ndarray: Shape (prod(q_i + 1), len(q)).
    """
    q = validate_totals(q)
    count = candidate_count(q)
    if max_candidates is not None and count > max_candidates:
        raise CandidateLimitError(
            f"{count} allocations for q={q.tolist()} exceeds the limit of {max_candidates}"
        )
    grids = np.meshgrid(*[np.arange(v + 1) for v in q], indexing="ij")
    cands = np.stack([g.ravel() for g in grids], axis=1)
    logger.debug("Enumerated %d allocations for q=%s", count, q.tolist())
    return cands
