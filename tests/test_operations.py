"""
Tests for operation types.
"""

from fractions import Fraction
import math
import unittest
from warehouse_simulator.models import AGV
from warehouse_simulator.operations import (
    FixedDurationOperation,
    Operation,
    TransportOperation,
)


class TestFixedDurationOperation(unittest.TestCase):
    """Test FixedDurationOperation class."""

    def setUp(self):
        self.agv = AGV("AGV-A", 15.0, 2.0, 30.0, "Dock-1", 2.0, 1.2)

    def test_duration_equals_nominal(self):
        """Test duration and nominal duration are the constructor value."""
        for minutes in (0.0, 4.0, 6.5, 120.0):
            op = FixedDurationOperation("OP-1", "Dock receive", minutes, [self.agv])
            self.assertEqual(op.duration_minutes(), minutes)
            self.assertEqual(op.nominal_duration_minutes(), minutes)

    def test_duration_ignores_agv_speed(self):
        """Test a stalled AGV does not affect a fixed operation."""
        op = FixedDurationOperation("OP-1", "Dock receive", 6.0, [self.agv])
        self.agv.actual_speed_mps = 0.0
        self.assertEqual(op.duration_minutes(), 6.0)

    def test_no_resources(self):
        """Test a fixed operation may require no AGV."""
        op = FixedDurationOperation("OP-9", "Manual inspection", 3.0)
        self.assertEqual(op.resources, ())

    def test_resources_keep_order_and_repeats(self):
        """Test resources are kept in the given order, repeats included."""
        other = AGV("AGV-B", 15.0, 1.8, 30.0, "Dock-2", 2.0, 1.0)
        op = FixedDurationOperation("OP-2", "Tandem lift", 2.0, [other, self.agv, other])
        self.assertEqual([a.id for a in op.resources], ["AGV-B", "AGV-A", "AGV-B"])

    def test_resources_are_read_only(self):
        """Test the resource view cannot be mutated."""
        agvs = [self.agv]
        op = FixedDurationOperation("OP-1", "Dock receive", 6.0, agvs)
        agvs.append(AGV("AGV-B", 15.0, 1.8, 30.0, "Dock-2", 2.0, 1.0))
        self.assertEqual(len(op.resources), 1)
        self.assertIsInstance(op.resources, tuple)

    def test_identity(self):
        op = FixedDurationOperation("OP-3", "Putaway at rack", 4.0, [self.agv])
        self.assertEqual(op.id, "OP-3")
        self.assertEqual(op.description, "Putaway at rack")
        self.assertIsInstance(op, Operation)


class TestTransportOperation(unittest.TestCase):
    """Test TransportOperation class."""

    def setUp(self):
        self.agv = AGV("AGV-A", 15.0, 2.0, 30.0, "Dock-1", 2.0, 1.2)

    def test_duration_formula(self):
        """Test duration is travel time plus the fixed overhead."""
        for distance, speed in ((120.0, 1.2), (150.0, 1.0), (0.0, 2.0), (33.3, 0.7)):
            self.agv.actual_speed_mps = speed
            op = TransportOperation("OP-2", "Move", distance, self.agv)
            self.assertAlmostEqual(op.duration_minutes(), (distance / speed) / 60 + 0.5, delta=1e-9)

    def test_demo_transport_duration(self):
        op = TransportOperation("OP-2", "Move pallets to storage (120 m)", 120.0, self.agv)
        self.assertAlmostEqual(op.duration_minutes(), 2.1666666667, places=9)

    def test_stalled_agv_gives_infinite_duration(self):
        """Test zero or negative speed returns positive infinity."""
        op = TransportOperation("OP-2", "Move", 120.0, self.agv)
        for speed in (0.0, -1.0):
            self.agv.actual_speed_mps = speed
            self.assertEqual(op.duration_minutes(), math.inf)
            self.assertEqual(op.nominal_duration_minutes(), math.inf)

    def test_nominal_tracks_speed(self):
        """Test the nominal duration is the computed, speed-dependent one."""
        op = TransportOperation("OP-2", "Move", 120.0, self.agv)
        self.assertEqual(op.nominal_duration_minutes(), op.duration_minutes())
        self.agv.actual_speed_mps = 2.0
        self.assertAlmostEqual(op.nominal_duration_minutes(), 1.5)
        self.assertAlmostEqual(op.duration_minutes(), 1.5)

    def test_speed_above_max_is_used(self):
        """Test actual speed is not clamped to the maximum."""
        self.agv.actual_speed_mps = 4.0
        op = TransportOperation("OP-2", "Move", 240.0, self.agv)
        self.assertAlmostEqual(op.duration_minutes(), 1.5)

    def test_negative_distance_passes_through(self):
        op = TransportOperation("OP-2", "Move", -120.0, self.agv)
        self.assertAlmostEqual(op.duration_minutes(), -100.0 / 60 + 0.5)

    def test_distance_recorded_in_data(self):
        """Test the distance is stored under the distance key."""
        op = TransportOperation("OP-2", "Move", 120.0, self.agv)
        self.assertEqual(op.get_data("distance_m"), 120.0)
        self.assertEqual(op.distance_m, 120.0)

    def test_single_resource(self):
        op = TransportOperation("OP-2", "Move", 120.0, self.agv)
        self.assertEqual(op.resources, (self.agv,))
        self.assertIs(op.agv, self.agv)

    def test_real_number_distance(self):
        """Test any real number is accepted as a distance and stored as float."""
        op = TransportOperation("OP-2", "Move", Fraction(120), self.agv)
        self.assertIsInstance(op.get_data("distance_m"), float)
        self.assertEqual(op.get_data("distance_m"), 120.0)
        self.assertAlmostEqual(op.duration_minutes(), (120.0 / 1.2) / 60 + 0.5)


class TestOperationData(unittest.TestCase):
    """Test operation metadata."""

    def setUp(self):
        self.op = FixedDurationOperation("OP-1", "Dock receive", 6.0)

    def test_set_and_get(self):
        self.op.set_data("pallets", 4)
        self.op.set_data("zone", "A")
        self.op.set_data("fragile", True)
        self.assertEqual(self.op.get_data("pallets"), 4)
        self.assertEqual(self.op.get_data("zone"), "A")
        self.assertTrue(self.op.get_data("fragile"))

    def test_real_number_values(self):
        """Test numeric types registered as real numbers are accepted."""
        self.op.set_data("weight_kg", Fraction(5, 2))
        self.assertEqual(self.op.get_data("weight_kg"), 2.5)

    def test_missing_key(self):
        """Test a missing key returns None or the given default."""
        self.assertIsNone(self.op.get_data("distance_m"))
        self.assertEqual(self.op.get_data("distance_m", 0.0), 0.0)

    def test_fixed_operation_has_no_keys(self):
        self.assertEqual(dict(self.op.data), {})

    def test_unsupported_value_rejected(self):
        """Test values other than strings, numbers and booleans raise TypeError."""
        with self.assertRaises(TypeError):
            self.op.set_data("route", ["A", "B"])
        with self.assertRaises(TypeError):
            self.op.set_data("nothing", None)

    def test_non_string_key_rejected(self):
        with self.assertRaises(TypeError):
            self.op.set_data(1, "value")

    def test_data_view_is_read_only(self):
        self.op.set_data("zone", "A")
        with self.assertRaises(TypeError):
            self.op.data["zone"] = "B"

    def test_data_is_operation_local(self):
        """Test metadata is not shared between operations."""
        other = FixedDurationOperation("OP-2", "Pick", 5.0)
        self.op.set_data("zone", "A")
        self.assertIsNone(other.get_data("zone"))


if __name__ == '__main__':
    unittest.main()
