"""
Tests for command dispatch.
"""

import unittest
from transport_simulator.commands import (
    CreateMission,
    Exit,
    ListActiveMissions,
    ListVehicles,
    RegisterVehicle,
    ShowVehicle,
    SimulateAll,
    SimulateMission,
    dispatch,
)
from transport_simulator.environment import Environment
from transport_simulator.errors import (
    DuplicateIdError,
    IncompatibleVehicleError,
    InvalidSelectionError,
    VehicleNotFoundError,
)
from transport_simulator.events import RecordingSink
from transport_simulator.obstacles import ObstacleGenerator


class TestDispatch(unittest.TestCase):
    """Test dispatch over every command."""

    def setUp(self):
        """Set up an environment with a recording sink."""
        self.sink = RecordingSink()
        self.env = Environment(events=self.sink, obstacles=ObstacleGenerator(seed=3))

    def test_register_and_duplicate(self):
        """Test registering A1 twice."""
        result = dispatch(self.env, RegisterVehicle(1, "A1"))
        self.assertTrue(result.ok)
        self.assertEqual(result.message, "Car registered successfully.")

        result = dispatch(self.env, RegisterVehicle(1, "A1"))
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, DuplicateIdError)
        self.assertIn("A1", result.message)
        self.assertEqual(len(self.env.vehicles), 1)

    def test_register_invalid_option(self):
        """Test an unknown vehicle option is reported."""
        result = dispatch(self.env, RegisterVehicle(7, "A1"))
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, InvalidSelectionError)

    def test_list_vehicles(self):
        """Test listing returns vehicles in order."""
        dispatch(self.env, RegisterVehicle(2, "D1"))
        dispatch(self.env, RegisterVehicle(1, "A1"))
        result = dispatch(self.env, ListVehicles())
        self.assertEqual([(v.id, v.kind_name) for v in result.payload], [("D1", "Drone"), ("A1", "Car")])

    def test_create_mission(self):
        """Test mission creation results."""
        dispatch(self.env, RegisterVehicle(1, "A1"))
        result = dispatch(self.env, CreateMission("X", "Y", 1, "A1"))
        self.assertTrue(result.ok)
        self.assertFalse(result.payload.completed)

        result = dispatch(self.env, CreateMission("X", "Y", 2, "A1"))
        self.assertIsInstance(result.error, IncompatibleVehicleError)

        result = dispatch(self.env, CreateMission("X", "Y", 1, "B7"))
        self.assertIsInstance(result.error, VehicleNotFoundError)
        self.assertEqual(len(self.env.missions), 1)

    def test_simulate_all_then_list(self):
        """Test the active list is empty after simulating the only mission."""
        dispatch(self.env, RegisterVehicle(1, "A1"))
        dispatch(self.env, CreateMission("X", "Y", 1, "A1"))
        result = dispatch(self.env, SimulateAll())
        self.assertTrue(result.ok)
        self.assertEqual(len(result.payload), 1)
        self.assertIn("Car moving along the road.", self.sink)
        self.assertEqual(dispatch(self.env, ListActiveMissions()).payload, [])

    def test_simulate_mission_by_index(self):
        """Test picking an active mission by its 1-based position."""
        dispatch(self.env, RegisterVehicle(3, "M1"))
        first = dispatch(self.env, CreateMission("A", "B", 1, "M1")).payload
        second = dispatch(self.env, CreateMission("C", "D", 3, "M1")).payload

        result = dispatch(self.env, SimulateMission(2))
        self.assertTrue(result.ok)
        self.assertTrue(second.completed)
        self.assertFalse(first.completed)

        # the active list shrank, so index 2 is now out of range
        result = dispatch(self.env, SimulateMission(2))
        self.assertIsInstance(result.error, InvalidSelectionError)
        result = dispatch(self.env, SimulateMission(0))
        self.assertIsInstance(result.error, InvalidSelectionError)

    def test_simulate_mission_without_active(self):
        """Test picking a mission when none is active."""
        result = dispatch(self.env, SimulateMission(1))
        self.assertFalse(result.ok)
        self.assertEqual(result.message, "No active missions to simulate.")

    def test_show_vehicle(self):
        """Test the details command."""
        dispatch(self.env, RegisterVehicle(4, "S1"))
        result = dispatch(self.env, ShowVehicle("S1"))
        self.assertEqual(result.payload["location"], "Submarine Base")
        self.assertIsInstance(dispatch(self.env, ShowVehicle("S2")).error, VehicleNotFoundError)

    def test_exit(self):
        """Test exit marks the result done."""
        result = dispatch(self.env, Exit())
        self.assertTrue(result.ok and result.done)

    def test_unknown_command(self):
        """Test unsupported command values are a programming error."""
        with self.assertRaises(TypeError):
            dispatch(self.env, "register")


if __name__ == '__main__':
    unittest.main()
