"""Simulation constants for the warehouse logistics model.

Unit factors, the transport overhead, metadata keys, report formatting and the
parameters of the demonstration scenario live here as plain module constants.
"""

# Unit conversion
SECONDS_PER_MINUTE = 60.0
MINUTES_PER_HOUR = 60.0

# Transport operations add a fixed start/stop and docking overhead (minutes)
TRANSPORT_OVERHEAD_MINUTES = 0.5

# Operation metadata keys
DISTANCE_KEY = "distance_m"

# Report formatting
DESCRIPTION_WIDTH = 18
DURATION_DECIMALS = 2
ENERGY_DECIMALS = 3
ID_SEPARATOR = ", "

# Demonstration scenario: AGV configuration
DEMO_BATTERY_KWH = 15.0
DEMO_CHARGING_TIME_MIN = 30.0
DEMO_MAX_SPEED_MPS = 2.0

AGV_A_CONSUMPTION_KW = 2.0
AGV_A_SPEED_MPS = 1.2
AGV_A_POSITION = "Dock-1"

AGV_B_CONSUMPTION_KW = 1.8
AGV_B_SPEED_MPS = 1.0
AGV_B_POSITION = "Dock-2"

# Demonstration scenario: transport distances (meters)
INBOUND_DISTANCE_M = 120.0
OUTBOUND_DISTANCE_M = 150.0
