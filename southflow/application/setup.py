import logging
import random
from typing import Optional

from southflow.domain import config
from southflow.domain.errors import EmptyDestinationSet, NoEligibleDestination
from southflow.domain.graph import RoadNetwork
from southflow.domain.grid import build_grid_network
from southflow.domain.models import (
    GridSettings, Lane, ManagerPolicy, ProtocolSettings, ScenarioReport, SpawnClass
)
from southflow.scenario.classifier import SpawnPointClassifier
from southflow.scenario.destination import DualExcludingDestinationSelector
from southflow.scenario.wiring import ScenarioWiring

logger = logging.getLogger(__name__)

def configure_directional_scenario(network: RoadNetwork, directional_rate: float,
                                   margin_fraction: float = config.SOUTH_MARGIN_FRACTION,
                                   rng: Optional[random.Random] = None) -> ScenarioReport:
    """Classify the spawn points of ``network`` and wire their generators.

    Raises EmptyDestinationSet when the network has no destination roads and
    NoEligibleDestination when an active spawn point has nowhere to go.
    """
    rng = rng or random.Random()
    destinations = network.destination_roads
    if not destinations:
        raise EmptyDestinationSet()
    logger.debug("Destination roads: %s", [(r.id, len(r.lane_ids)) for r in destinations])

    spawn_points = network.spawn_points
    classifier = SpawnPointClassifier(margin_fraction)
    classification = classifier.classify(spawn_points)
    threshold = classifier.threshold(spawn_points) if spawn_points else None

    # Fail before any generator slot changes
    checker = DualExcludingDestinationSelector(network, rng)
    for sp in spawn_points:
        if classification[sp.id] != SpawnClass.DIRECTIONAL:
            continue
        lane = network.get_lane(sp.lane_id) or Lane(id=sp.lane_id)
        if network.get_road(lane) is None:
            logger.warning("LaneNotInAnyRoad: spawn point %s lane %s", sp.id, sp.lane_id)
        if not checker.candidates_for(lane):
            road = network.get_road(lane)
            raise NoEligibleDestination(lane.id, road.id if road else None)

    summary = ScenarioWiring(network, rng).wire(spawn_points, classification, directional_rate)

    return ScenarioReport(
        directional_rate=directional_rate,
        margin_fraction=margin_fraction,
        threshold=threshold,
        classification=classification,
        wiring=summary,
        destination_road_ids=[r.id for r in destinations],
    )

class SouthOnlyProtocolSetup:
    """Four-way grid where only south entrances generate traffic.

    Vehicles enter from the south and exit north, east or west.
    """

    def __init__(self, grid: Optional[GridSettings] = None, protocol: Optional[ProtocolSettings] = None):
        self.grid = grid or GridSettings()
        self.protocol = protocol or ProtocolSettings()
        self.network: Optional[RoadNetwork] = None

    def build(self, rng: Optional[random.Random] = None) -> ScenarioReport:
        self.network = build_grid_network(self.grid)
        report = configure_directional_scenario(
            self.network,
            self.grid.traffic_level,
            margin_fraction=self.protocol.margin_fraction,
            rng=rng,
        )
        if self.protocol.is_batch_mode:
            report.manager_policy = ManagerPolicy.BATCH
            report.processing_interval = self.protocol.processing_interval
        else:
            report.manager_policy = ManagerPolicy.FCFS
        report.reservation_grid = self.protocol.buffers
        logger.info(
            "South-only scenario ready: %s managers, %d active spawn points",
            report.manager_policy.value, report.wiring.activated,
        )
        return report
