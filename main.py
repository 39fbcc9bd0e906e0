import logging
import os

import matplotlib.pyplot as plt

from config import OPP_POINTS, SELF_POINTS, load_params
from model import evaluate_params, sweep_allocations, sweep_params
from plotting import plot_allocation_scatter, plot_angle_sweep
from utils import clamp_weights, dot, point_totals


def main(theta_deg=0.0, show=True):
    params = load_params()
    w_self = clamp_weights(params.w_self, params.w_max, params.rounding)
    w_other = clamp_weights(params.w_other, params.w_max, params.rounding)
    print(f"q={list(params.q)}  x={list(params.x)}  (other receives q - x)")
    print(f"w_self clamped:  [{', '.join(f'{v:.1f}' for v in w_self)}]")
    print(f"w_other clamped: [{', '.join(f'{v:.1f}' for v in w_other)}]")

    # Totals table
    total_self, total_opp = point_totals(params.x, params.q, SELF_POINTS, OPP_POINTS)
    print(f"Total points: self={total_self:g}, opponent={total_opp:g}")

    probs = evaluate_params(params, theta_deg)
    print(f"P_other(E | θ={theta_deg:g}°):")
    for label, p in probs.items():
        print(f"  {label:<8} {p:.3f}")

    rows = sweep_params(params)
    points = sweep_allocations(w_self, w_other, params.q, theta_deg, params.beta,
                               params.tau1, params.tau2, params.sad_band,
                               u_min=params.u_min, eps=params.eps)
    other_share = [qi - xi for qi, xi in zip(params.q, params.x)]
    current = (dot(w_self, params.x), dot(w_other, other_share))

    fig, axes = plt.subplots(1, 2, figsize=(18, 7))
    plot_angle_sweep(rows, ax=axes[0])
    plot_allocation_scatter(points, ax=axes[1], current=current)
    fig.tight_layout()
    if show:
        plt.show()
    return fig


if __name__ == '__main__':
    logging.basicConfig(
        level=os.getenv("ELE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main()
