import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from model import sweep_allocations, sweep_angle
from plotting import plot_allocation_scatter, plot_angle_sweep

from conftest import X


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_angle_sweep_plot(scenario):
    ax = plot_angle_sweep(sweep_angle(x=X, theta_step=5, **scenario))
    # four curves plus the reference line at 0
    assert len(ax.get_lines()) == 5
    assert ax.get_ylim() == (0, 1)


def test_allocation_scatter_plot(scenario):
    fig, ax = plt.subplots()
    out = plot_allocation_scatter(sweep_allocations(theta_deg=0, **scenario), ax=ax,
                                  current=(2.5, 2.7))
    assert out is ax
    assert len(ax.collections) == 5
