# Scenario Configuration

# Grid Settings (1x1 four-way intersection)
GRID_COLUMNS = 1
GRID_ROWS = 1
LANE_WIDTH = 4.0
SPEED_LIMIT = 25.0
LANES_PER_ROAD = 3
MEDIAN_SIZE = 1.0
DISTANCE_BETWEEN = 150.0
STOP_DIST_BEFORE_INTERSECTION = 1.0

# Directional Scenario
TRAFFIC_LEVEL = 0.28          # Vehicles per second per active lane
SOUTH_MARGIN_FRACTION = 0.1   # Share of the Y range (nearest max Y) treated as south

# Timing
TIME_STEP = 0.02              # Seconds per simulation tick
GRID_TIME_STEP = TIME_STEP
SPAWN_TIME_STEP = 0.1         # Granularity of spawn decisions

# Reservation Grid (consumed by the external intersection managers)
STATIC_BUFFER_SIZE = 0.25
INTERNAL_TILE_TIME_BUFFER_SIZE = 0.1
EDGE_TILE_TIME_BUFFER_SIZE = 0.25
EDGE_TILE_TIME_BUFFER_ENABLED = True
GRANULARITY = 1.0
BATCH_PROCESSING_INTERVAL = 2.0

# Vehicles
VEHICLE_TYPES = ["coupe", "sedan", "suv", "van"]
MAX_TRACKED_VEHICLES = 500
