"""
Tests for the vehicle hierarchy and capability contracts.
"""

import unittest
from transport_simulator.capabilities import (
    Capability,
    ElectricPowered,
    Flying,
    FuelPowered,
    Rolling,
    Swimming,
)
from transport_simulator.errors import InvalidSelectionError
from transport_simulator.events import DEFAULT_SINK, RecordingSink
from transport_simulator.vehicles import (
    Amphibious,
    Car,
    Drone,
    Submarine,
    Vehicle,
    VehicleKind,
)


class TestVehicleDefaults(unittest.TestCase):
    """Test variant defaults."""

    def test_car_defaults(self):
        """Test a car starts at the main warehouse with 1000 capacity."""
        car = Car("A1")
        self.assertEqual(car.id, "A1")
        self.assertEqual(car.capacity, 1000.0)
        self.assertEqual(car.location, "Main Warehouse")

    def test_other_defaults(self):
        """Test drone, amphibious and submarine defaults."""
        self.assertEqual((Drone("D").capacity, Drone("D").location), (5.0, "Drone Base"))
        self.assertEqual((Amphibious("M").capacity, Amphibious("M").location), (500.0, "Loading Dock"))
        self.assertEqual((Submarine("S").capacity, Submarine("S").location), (2000.0, "Submarine Base"))

    def test_id_is_mutable(self):
        """Test the id can be changed after construction."""
        car = Car("A1")
        car.id = "B2"
        self.assertEqual(car.id, "B2")

    def test_non_positive_capacity_rejected(self):
        """Test a vehicle needs a positive, finite capacity."""

        class Cart(Vehicle, Rolling):
            def __init__(self, id, capacity):
                super().__init__(id, capacity, "Yard")

            def move(self):
                pass

            def load(self):
                pass

            def unload(self):
                pass

            def drive(self):
                pass

        for capacity in (0, -1, float("nan"), float("inf")):
            with self.subTest(capacity=capacity):
                with self.assertRaises(ValueError):
                    Cart("C1", capacity)
        self.assertEqual(Cart("C2", 3).capacity, 3.0)

    def test_vehicle_is_abstract(self):
        """Test the base class cannot be instantiated."""
        with self.assertRaises(TypeError):
            Vehicle("X", 1.0, "Nowhere")


class TestCapabilities(unittest.TestCase):
    """Test capability composition per variant."""

    def test_capability_sets(self):
        """Test each variant exposes exactly its contracts."""
        self.assertEqual(Car("A").capabilities, Capability.ROLLING | Capability.FUEL)
        self.assertEqual(Drone("D").capabilities, Capability.FLYING | Capability.ELECTRIC)
        self.assertEqual(Amphibious("M").capabilities, Capability.ROLLING | Capability.SWIMMING)
        self.assertEqual(Submarine("S").capabilities, Capability.SWIMMING)

    def test_contract_instances(self):
        """Test variants are instances of their contract classes."""
        self.assertIsInstance(Car("A"), Rolling)
        self.assertIsInstance(Car("A"), FuelPowered)
        self.assertNotIsInstance(Car("A"), Flying)
        self.assertIsInstance(Drone("D"), ElectricPowered)
        self.assertIsInstance(Amphibious("M"), Swimming)
        self.assertNotIsInstance(Submarine("S"), Rolling)

    def test_has(self):
        """Test single capability lookups."""
        amphibious = Amphibious("M")
        self.assertTrue(amphibious.has(Capability.ROLLING))
        self.assertTrue(amphibious.has(Capability.SWIMMING))
        self.assertFalse(amphibious.has(Capability.FLYING))

    def test_members_and_labels(self):
        """Test capability names used in detail views."""
        caps = Drone("D").capabilities
        self.assertEqual([c.label for c in caps.members()], ["Flying", "Electric-powered"])


class TestVehicleBehaviour(unittest.TestCase):
    """Test the descriptions each variant emits."""

    def setUp(self):
        """Set up a recording sink."""
        self.sink = RecordingSink()

    def test_car_descriptions(self):
        """Test car movement, cargo and capability descriptions."""
        car = Car("A1", events=self.sink)
        car.move()
        car.load()
        car.unload()
        car.drive()
        car.refuel()
        self.assertEqual(self.sink.messages, [
            "Car moving along the road.",
            "Car loading cargo.",
            "Car unloading at the delivery point.",
            "Car in manual driving mode.",
            "Car refuelling with petrol.",
        ])

    def test_drone_descriptions(self):
        """Test drone capability descriptions."""
        drone = Drone("D1", events=self.sink)
        drone.fly()
        drone.recharge_battery()
        drone.move()
        self.assertEqual(self.sink.messages, [
            "Drone climbing to 100 metres.",
            "Lithium-ion battery recharging.",
            "Drone travelling through the air.",
        ])

    def test_amphibious_descriptions(self):
        """Test amphibious drives and sails."""
        amphibious = Amphibious("M1", events=self.sink)
        amphibious.drive()
        amphibious.navigate()
        amphibious.unload()
        self.assertEqual(self.sink.messages, [
            "Amphibious in 4x4 mode.",
            "Amphibious sailing at 5 knots.",
            "Amphibious unloading over its hydraulic ramp.",
        ])

    def test_submarine_descriptions(self):
        """Test submarine movement and sonar navigation."""
        submarine = Submarine("S1", events=self.sink)
        submarine.move()
        submarine.navigate()
        submarine.load()
        self.assertIn("Submarine diving to 200 metres.", self.sink)
        self.assertIn("Submarine navigating by sonar.", self.sink)
        self.assertIn("Submarine loading underwater equipment.", self.sink)

    def test_default_sink_until_bound(self):
        """Test a vehicle built without a sink uses the default until an owner binds one."""
        car = Car("A1")
        self.assertIs(car.events, DEFAULT_SINK)
        car.bind_events(self.sink)
        self.assertIs(car.events, self.sink)
        car.bind_events(RecordingSink())
        self.assertIs(car.events, self.sink)

    def test_empty_recording_sink_is_kept(self):
        """Test an empty sink is not replaced by the console default."""
        car = Car("A1", events=self.sink)
        self.assertIs(car.events, self.sink)

    def test_describe(self):
        """Test the plain-data view of a vehicle."""
        details = Submarine("S1").describe()
        self.assertEqual(details, {
            "id": "S1",
            "kind": "Submarine",
            "capacity": 2000.0,
            "location": "Submarine Base",
            "capabilities": ["Swimming"],
        })


class TestVehicleKind(unittest.TestCase):
    """Test the closed variant set."""

    def test_from_option(self):
        """Test menu options map to variants."""
        self.assertIs(VehicleKind.from_option(1), VehicleKind.CAR)
        self.assertIs(VehicleKind.from_option(4), VehicleKind.SUBMARINE)

    def test_invalid_option(self):
        """Test out of range options are rejected."""
        for option in (0, 5, -1):
            with self.assertRaises(InvalidSelectionError):
                VehicleKind.from_option(option)

    def test_create_and_of(self):
        """Test building a vehicle from its kind and reading the kind back."""
        drone = VehicleKind.DRONE.create("D9")
        self.assertIsInstance(drone, Drone)
        self.assertIs(drone.kind, VehicleKind.DRONE)
        self.assertEqual(VehicleKind.AMPHIBIOUS.label, "Amphibious")


if __name__ == '__main__':
    unittest.main()
