import random
from typing import List, Optional, Sequence

from southflow.domain import config
from southflow.domain.graph import RoadNetwork
from southflow.domain.models import Lane, SpawnPoint, SpawnSpec
from southflow.scenario.destination import DestinationSelector

class UniformSpawnSpecGenerator:
    """Spawns vehicles of uniformly chosen types at a constant rate.

    ``rate`` is vehicles per second, not a per-tick probability; each
    ``SPAWN_TIME_STEP`` slice of a tick spawns with probability
    ``rate * slice length``. Ticks shorter than ``SPAWN_TIME_STEP`` use a
    single slice, so a rate of 0.28 with a 0.02s tick spawns with
    probability 0.0056 per tick.
    """

    def __init__(self, rate: float, selector: DestinationSelector,
                 rng: Optional[random.Random] = None,
                 vehicle_types: Sequence[str] = tuple(config.VEHICLE_TYPES)):
        if rate < 0:
            raise ValueError(f"Traffic rate must be non-negative, got {rate}")
        self.rate = rate
        self.selector = selector
        self.rng = rng or random.Random()
        self.vehicle_types = list(vehicle_types)

    def act(self, spawn_point: SpawnPoint, network: RoadNetwork, current_time: float, time_step: float) -> List[SpawnSpec]:
        specs: List[SpawnSpec] = []
        if self.rate <= 0.0:
            return specs

        lane = network.get_lane(spawn_point.lane_id) or Lane(id=spawn_point.lane_id)
        slices = max(1, int(round(time_step / config.SPAWN_TIME_STEP)))
        slice_len = time_step / slices
        prob = self.rate * slice_len
        for i in range(slices):
            if self.rng.random() < prob:
                vehicle_type = self.vehicle_types[self.rng.randrange(len(self.vehicle_types))]
                destination = self.selector.select_destination(lane)
                specs.append(SpawnSpec(
                    spawn_time=current_time + i * slice_len,
                    vehicle_type=vehicle_type,
                    destination_road_id=destination.id,
                ))
        return specs
