from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from southflow.domain import config

class SpawnClass(str, Enum):
    DIRECTIONAL = "DIRECTIONAL"
    OTHER = "OTHER"

class ManagerPolicy(str, Enum):
    FCFS = "FCFS"
    BATCH = "BATCH"

class Position(BaseModel):
    x: float
    y: float

class Lane(BaseModel):
    id: str  # e.g., "L-NB0-1"
    width: float = config.LANE_WIDTH

class Road(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # e.g., "NB0" (northbound, column 0)
    name: str = ""
    lane_ids: List[str] = []
    dual_id: Optional[str] = None

class SpawnPoint(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    position: Position
    lane_id: str
    generator: Optional[Any] = None # Set by ScenarioWiring

class SpawnSpec(BaseModel):
    spawn_time: float
    vehicle_type: str
    destination_road_id: str

class DestinationChoice(BaseModel):
    lane_id: str
    current_road_id: Optional[str] = None
    destination_road_id: str
    lane_matched: bool = True

class Vehicle(BaseModel):
    id: str
    type: str
    spawn_point_id: str
    lane_id: str
    destination_road_id: str
    spawn_time: float

# Settings

class GridSettings(BaseModel):
    columns: int = Field(config.GRID_COLUMNS, ge=1)
    rows: int = Field(config.GRID_ROWS, ge=1)
    lane_width: float = Field(config.LANE_WIDTH, gt=0)
    speed_limit: float = config.SPEED_LIMIT
    lanes_per_road: int = Field(config.LANES_PER_ROAD, ge=1)
    median_size: float = Field(config.MEDIAN_SIZE, ge=0)
    distance_between: float = Field(config.DISTANCE_BETWEEN, gt=0)
    traffic_level: float = Field(config.TRAFFIC_LEVEL, ge=0)
    stop_dist_before_intersection: float = config.STOP_DIST_BEFORE_INTERSECTION

class ReservationGridConfig(BaseModel):
    time_step: float = config.TIME_STEP
    grid_time_step: float = config.GRID_TIME_STEP
    static_buffer_size: float = config.STATIC_BUFFER_SIZE
    internal_tile_time_buffer_size: float = config.INTERNAL_TILE_TIME_BUFFER_SIZE
    edge_tile_time_buffer_size: float = config.EDGE_TILE_TIME_BUFFER_SIZE
    is_edge_tile_time_buffer_enabled: bool = config.EDGE_TILE_TIME_BUFFER_ENABLED
    granularity: float = config.GRANULARITY

class ProtocolSettings(BaseModel):
    is_batch_mode: bool = False
    processing_interval: float = config.BATCH_PROCESSING_INTERVAL
    margin_fraction: float = Field(config.SOUTH_MARGIN_FRACTION, ge=0.0, le=1.0)
    buffers: ReservationGridConfig = ReservationGridConfig()

# Reports / API Response Models

class WiringSummary(BaseModel):
    activated: int
    deactivated: int
    rates: Dict[str, float] # spawn point id -> rate

class ScenarioReport(BaseModel):
    directional_rate: float
    margin_fraction: float
    threshold: Optional[float] = None
    classification: Dict[str, SpawnClass]
    wiring: WiringSummary
    destination_road_ids: List[str]
    manager_policy: ManagerPolicy = ManagerPolicy.FCFS
    processing_interval: Optional[float] = None
    reservation_grid: Optional[ReservationGridConfig] = None

class SpawnPointSummary(BaseModel):
    id: str
    x: float
    y: float
    laneId: str
    roadId: Optional[str]
    spawnClass: SpawnClass
    rate: float

class ScenarioState(BaseModel):
    tick: int
    time: float
    spawned: int
    destinationCounts: Dict[str, int]
    vehicles: List[Vehicle]
