"""
Basic example of using the transport simulator without the interactive menu.
"""

from transport_simulator import (
    Environment,
    FleetAnalyzer,
    IncompatibleVehicleError,
    MissionKind,
    ObstacleGenerator,
    VehicleKind,
)


def main():
    print("=" * 80)
    print("Transport Simulator - Basic Example")
    print("=" * 80)

    env = Environment(obstacles=ObstacleGenerator(seed=42))

    print("\nRegistering vehicles...")
    env.register_vehicle(VehicleKind.CAR, "A1")
    env.register_vehicle(VehicleKind.DRONE, "D1")
    env.register_vehicle(VehicleKind.AMPHIBIOUS, "M1")
    env.register_vehicle(VehicleKind.SUBMARINE, "S1")
    for vehicle in env.vehicles:
        print(f"  {vehicle.id} ({vehicle.kind_name})")

    print("\nCreating missions...")
    env.create_mission("Main Warehouse", "City Centre", MissionKind.LAND, "A1", cargo_weight=350)
    env.create_mission("Drone Base", "Hospital Roof", MissionKind.AIR, "D1", cargo_weight=2.5)
    env.create_mission("Loading Dock", "Island Pier", MissionKind.WATER, "M1")
    env.create_mission("Submarine Base", "Research Station", MissionKind.WATER, "S1", cargo_weight=1200)

    try:
        env.create_mission("Main Warehouse", "Rooftop", MissionKind.AIR, "A1")
    except IncompatibleVehicleError as e:
        print(f"  Rejected: {e}")

    print(f"Active missions: {len(env.active_missions())}")

    print("\n" + "-" * 80)
    print("Simulating the first mission on its own...")
    env.simulate_cycle(env.active_missions()[0])

    print("-" * 80)
    print("Simulating the rest...")
    env.simulate_cycle()

    print("-" * 80)
    FleetAnalyzer(env).print_summary()

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
