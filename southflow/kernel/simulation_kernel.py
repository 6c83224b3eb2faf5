import logging
import random
from typing import Optional

from southflow.application.setup import SouthOnlyProtocolSetup
from southflow.domain import config
from southflow.domain.models import GridSettings, ProtocolSettings, ScenarioState, Vehicle
from southflow.domain.state import SimulationState

logger = logging.getLogger(__name__)

class SimulationKernel:
    """Seeded spawn loop over a south-only scenario.

    Vehicles are recorded when spawned; moving them is left to the host
    simulator.
    """

    def __init__(self, grid: Optional[GridSettings] = None, protocol: Optional[ProtocolSettings] = None):
        self.state = SimulationState()
        self.dt = config.TIME_STEP
        self.setup = SouthOnlyProtocolSetup(grid, protocol)
        self.rng = random.Random()
        self.initialized = False

    def initialize(self, seed: int = 42):
        self.state = SimulationState()
        self.rng.seed(seed)
        self.state.report = self.setup.build(rng=self.rng)
        self.state.road_network = self.setup.network
        self.initialized = True
        logger.info("Kernel initialized (seed %d)", seed)

    def run_tick(self):
        if not self.initialized:
            self.initialize()

        network = self.state.road_network
        for sp in network.spawn_points:
            for spec in sp.generator.act(sp, network, self.state.time, self.dt):
                self._spawn_vehicle(sp, spec)

        self.state.time += self.dt
        self.state.tick_id += 1

    def _spawn_vehicle(self, spawn_point, spec):
        vehicle = Vehicle(
            id=f"v-{self.state.tick_id}-{self.state.spawned}",
            type=spec.vehicle_type,
            spawn_point_id=spawn_point.id,
            lane_id=spawn_point.lane_id,
            destination_road_id=spec.destination_road_id,
            spawn_time=spec.spawn_time,
        )
        self.state.vehicles.append(vehicle)
        if len(self.state.vehicles) > config.MAX_TRACKED_VEHICLES:
            self.state.vehicles.pop(0)
        self.state.spawned += 1
        counts = self.state.destination_counts
        counts[spec.destination_road_id] = counts.get(spec.destination_road_id, 0) + 1
        logger.debug("Spawned %s at %s -> %s", vehicle.id, spawn_point.id, vehicle.destination_road_id)

    def get_state(self) -> ScenarioState:
        if not self.initialized:
            self.initialize()
        return ScenarioState(
            tick=self.state.tick_id,
            time=self.state.time,
            spawned=self.state.spawned,
            destinationCounts=dict(self.state.destination_counts),
            vehicles=list(self.state.vehicles),
        )
