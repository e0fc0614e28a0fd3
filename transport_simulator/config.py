"""Static configuration for the transport simulator.

Default vehicle parameters, obstacle tables and the banner texts printed by
the simulation cycle live here so they can be tuned in one place.
"""

# Vehicle defaults (capacity, starting location)
CAR_CAPACITY = 1000.0
CAR_LOCATION = "Main Warehouse"

DRONE_CAPACITY = 5.0
DRONE_LOCATION = "Drone Base"

AMPHIBIOUS_CAPACITY = 500.0
AMPHIBIOUS_LOCATION = "Loading Dock"

SUBMARINE_CAPACITY = 2000.0
SUBMARINE_LOCATION = "Submarine Base"

# Obstacle tables, one pick per simulated mission
LAND_OBSTACLES = ("Heavy traffic", "Road in poor condition", "Accident on the route")
AIR_OBSTACLES = ("Strong wind", "Low visibility", "Signal interference")
WATER_OBSTACLES = ("Strong currents", "Low underwater visibility", "Rock obstruction")

# Simulation banners
MISSION_HEADER = "--- MISSION SIMULATION START ---"
MISSION_FOOTER = "--- MISSION SIMULATION END ---"
CYCLE_HEADER = "--- SIMULATION CYCLE START ---"
CYCLE_FOOTER = "--- CYCLE END ---"

# Seed for the obstacle generator (None = fresh entropy every run)
OBSTACLE_SEED = None
