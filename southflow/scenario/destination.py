import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from southflow.domain.errors import EmptyDestinationSet, NoEligibleDestination
from southflow.domain.graph import RoadNetwork
from southflow.domain.models import DestinationChoice, Lane, Road

logger = logging.getLogger(__name__)

class DestinationSelector(ABC):
    @abstractmethod
    def select_destination(self, lane: Lane) -> Road:
        pass

class DualExcludingDestinationSelector(DestinationSelector):
    """Picks an exit road uniformly, never the dual of the road being left.

    The candidate set for each current road is filtered once and cached, so
    every draw is a single uniform pick and always terminates.
    """

    def __init__(self, network: RoadNetwork, rng: Optional[random.Random] = None):
        self.network = network
        self.rng = rng or random.Random()
        self.destination_roads: List[Road] = network.destination_roads
        if not self.destination_roads:
            raise EmptyDestinationSet()
        self._candidates: Dict[str, List[Road]] = {}

    def candidates_for(self, lane: Lane) -> List[Road]:
        current_road = self.network.get_road(lane)
        if current_road is None:
            return list(self.destination_roads)
        return list(self._candidates_for_road(current_road))

    def _candidates_for_road(self, current_road: Road) -> List[Road]:
        cached = self._candidates.get(current_road.id)
        if cached is None:
            cached = [
                r for r in self.destination_roads
                if r.id != current_road.dual_id and r.dual_id != current_road.id
            ]
            self._candidates[current_road.id] = cached
        return cached

    def _draw(self, lane: Lane) -> Tuple[Optional[Road], Road]:
        current_road = self.network.get_road(lane)
        if current_road is None:
            # Network/lane mismatch: no dual to exclude
            logger.warning("LaneNotInAnyRoad: lane %s, selecting from all destinations", lane.id)
            candidates = self.destination_roads
        else:
            candidates = self._candidates_for_road(current_road)

        if not candidates:
            raise NoEligibleDestination(lane.id, current_road.id if current_road else None)

        destination = candidates[self.rng.randrange(len(candidates))]
        logger.debug("Lane %s -> destination %s", lane.id, destination.id)
        return current_road, destination

    def choose(self, lane: Lane) -> DestinationChoice:
        """Like select_destination, but reports whether the lane was matched."""
        current_road, destination = self._draw(lane)
        return DestinationChoice(
            lane_id=lane.id,
            current_road_id=current_road.id if current_road else None,
            destination_road_id=destination.id,
            lane_matched=current_road is not None,
        )

    def select_destination(self, lane: Lane) -> Road:
        return self._draw(lane)[1]
