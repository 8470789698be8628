"""
Shared fixtures for the rampcurves tests.
"""

import pytest

from rampcurves.trajectory import Ramp, ParabolicCurve, ParabolicCurvesND


@pytest.fixture
def accel_ramp():
    """Ramp from rest with a = 2 for 2 s: v1 = 4, d = 4."""
    return Ramp(0, 2, 2, 0)


@pytest.fixture
def three_ramp_curve():
    """Accelerate, cruise, decelerate. Switch points at 0, 1, 3, 4."""
    return ParabolicCurve([Ramp(0, 1, 1, 0.5),
                           Ramp(1, 0, 2),
                           Ramp(1, -1, 1)])


@pytest.fixture
def two_dof_curves():
    """Two DOFs with switch points {0, 1, 3} and {0, 2, 3}."""
    curve0 = ParabolicCurve([Ramp(0, 1, 1, 0), Ramp(1, -0.5, 2)])
    curve1 = ParabolicCurve([Ramp(0, -1, 2, 1), Ramp(-2, 2, 1)])
    return [curve0, curve1]


@pytest.fixture
def two_dof_traj(two_dof_curves):
    return ParabolicCurvesND(two_dof_curves)
