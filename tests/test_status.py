"""
Tests for rampcurves/status.py
"""

import gc

from rampcurves import status
from rampcurves.status import ValidationStatus, GetStatus, ClearStatus
from rampcurves.trajectory import ParabolicCurvesND


class TestValidationStatus:
    """Marker records kept outside the trajectory objects."""

    def test_defaults(self):
        record = ValidationStatus()
        assert record.constraintchecked == 0
        assert record.modified == 0

    def test_same_record_per_object(self, two_dof_traj):
        assert GetStatus(two_dof_traj) is GetStatus(two_dof_traj)

    def test_properties_write_through(self, two_dof_traj):
        two_dof_traj.constraintchecked = 1
        two_dof_traj.modified = 2
        record = GetStatus(two_dof_traj)
        assert record.constraintchecked == 1
        assert record.modified == 2

    def test_records_are_per_object(self, two_dof_traj):
        other = ParabolicCurvesND()
        two_dof_traj.modified = 1
        assert other.modified == 0

    def test_clear(self, two_dof_traj):
        two_dof_traj.constraintchecked = 3
        ClearStatus(two_dof_traj)
        assert two_dof_traj.constraintchecked == 0

    def test_not_part_of_trajectory_state(self, two_dof_traj):
        assert "constraintchecked" not in vars(two_dof_traj)
        assert "modified" not in vars(two_dof_traj)

    def test_released_with_trajectory(self):
        traj = ParabolicCurvesND()
        traj.modified = 1
        record = GetStatus(traj)
        del traj
        gc.collect()
        assert all(value is not record for value in status._statuses.values())
