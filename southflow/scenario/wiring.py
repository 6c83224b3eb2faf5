import logging
import random
from typing import Callable, Dict, Optional, Sequence

from southflow.domain.graph import RoadNetwork
from southflow.domain.models import SpawnClass, SpawnPoint, WiringSummary
from southflow.scenario.destination import DestinationSelector, DualExcludingDestinationSelector
from southflow.scenario.generator import UniformSpawnSpecGenerator

logger = logging.getLogger(__name__)

class ScenarioWiring:
    """Attaches a traffic generator to every spawn point.

    Directional spawn points generate at the configured rate, all others at
    zero. Every generator gets its own selector bound to the network, so
    generators have the same shape whether active or not.
    """

    def __init__(self, network: RoadNetwork, rng: Optional[random.Random] = None,
                 selector_factory: Optional[Callable[[RoadNetwork, random.Random], DestinationSelector]] = None):
        self.network = network
        self.rng = rng or random.Random()
        self.selector_factory = selector_factory or DualExcludingDestinationSelector

    def wire(self, spawn_points: Sequence[SpawnPoint], classification: Dict[str, SpawnClass],
             directional_rate: float) -> WiringSummary:
        if directional_rate < 0:
            raise ValueError(f"directional_rate must be non-negative, got {directional_rate}")

        activated = 0
        deactivated = 0
        rates: Dict[str, float] = {}

        for sp in spawn_points:
            is_directional = classification.get(sp.id) == SpawnClass.DIRECTIONAL
            rate = directional_rate if is_directional else 0.0
            sp.generator = UniformSpawnSpecGenerator(
                rate, self.selector_factory(self.network, self.rng), rng=self.rng
            )
            rates[sp.id] = rate
            if is_directional:
                activated += 1
            else:
                deactivated += 1
            logger.debug(
                "Spawn point %s (%.1f, %.1f) lane %s directional=%s rate=%s",
                sp.id, sp.position.x, sp.position.y, sp.lane_id, is_directional, rate,
            )

        logger.info("Activated: %d, Deactivated: %d", activated, deactivated)
        return WiringSummary(activated=activated, deactivated=deactivated, rates=rates)
