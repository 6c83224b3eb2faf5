from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from southflow.domain.models import ScenarioReport, Vehicle
from southflow.domain.graph import RoadNetwork

class SimulationState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tick_id: int = 0
    time: float = 0.0
    vehicles: List[Vehicle] = []
    spawned: int = 0
    destination_counts: Dict[str, int] = {}

    # Built once by the setup, read-only while ticking
    road_network: Optional[RoadNetwork] = None
    report: Optional[ScenarioReport] = None
