import networkx as nx
from typing import Dict, List, Optional, Iterable

from southflow.domain.errors import LaneNotInAnyRoad
from southflow.domain.models import Lane, Road, SpawnPoint, Position

class RoadNetwork:
    """Read-only view of roads, lanes and spawn points.

    Roads and lanes are graph nodes. A road owns its lanes through
    ``owns`` edges, and dual roads are joined by a pair of ``dual`` edges.
    """

    def __init__(self):
        self.graph = nx.DiGraph()
        self._roads: Dict[str, Road] = {}
        self._lanes: Dict[str, Lane] = {}
        self._spawn_points: Dict[str, SpawnPoint] = {}
        self._destination_ids: List[str] = []

    def add_road(self, road_id: str, name: str = "", lanes: Iterable[Lane] = (), dual_id: Optional[str] = None) -> Road:
        lanes = list(lanes)
        road = Road(id=road_id, name=name, lane_ids=[l.id for l in lanes], dual_id=dual_id)
        self._roads[road_id] = road
        self.graph.add_node(road_id, kind="road")
        for lane in lanes:
            self._lanes[lane.id] = lane
            self.graph.add_node(lane.id, kind="lane")
            self.graph.add_edge(road_id, lane.id, kind="owns")
        if dual_id is not None:
            self.graph.add_edge(road_id, dual_id, kind="dual")
        return road

    def add_spawn_point(self, spawn_id: str, lane_id: str, pos: Position) -> SpawnPoint:
        spawn_point = SpawnPoint(id=spawn_id, position=pos, lane_id=lane_id)
        self._spawn_points[spawn_id] = spawn_point
        return spawn_point

    def set_destination_roads(self, road_ids: Iterable[str]):
        self._destination_ids = [r for r in road_ids if r in self._roads]

    # Queries

    @property
    def roads(self) -> List[Road]:
        return list(self._roads.values())

    @property
    def destination_roads(self) -> List[Road]:
        return [self._roads[r] for r in self._destination_ids]

    @property
    def spawn_points(self) -> List[SpawnPoint]:
        return list(self._spawn_points.values())

    def get_lanes(self, road: Road) -> List[Lane]:
        return [self._lanes[l] for l in road.lane_ids]

    def get_lane(self, lane_id: str) -> Optional[Lane]:
        return self._lanes.get(lane_id)

    def get_spawn_point(self, spawn_id: str) -> Optional[SpawnPoint]:
        return self._spawn_points.get(spawn_id)

    def get_road(self, lane: Lane) -> Optional[Road]:
        """The road owning ``lane``, or None when no road lists it."""
        if lane.id not in self.graph:
            return None
        for owner in self.graph.predecessors(lane.id):
            if self.graph.edges[owner, lane.id]["kind"] == "owns":
                return self._roads[owner]
        return None

    def require_road(self, lane: Lane) -> Road:
        road = self.get_road(lane)
        if road is None:
            raise LaneNotInAnyRoad(lane.id)
        return road

    def get_dual(self, road: Road) -> Optional[Road]:
        if road.dual_id is None:
            return None
        return self._roads.get(road.dual_id)
