import logging

from southflow.domain.graph import RoadNetwork
from southflow.domain.models import GridSettings, Lane, Position

logger = logging.getLogger(__name__)

def build_grid_network(settings: GridSettings) -> RoadNetwork:
    """Build a ``columns x rows`` grid of two-way roads.

    Screen coordinates: x grows east, y grows south. Each column carries a
    northbound/southbound pair and each row an eastbound/westbound pair.
    Every lane gets one spawn point at the edge of the map where it enters,
    so northbound lanes spawn on the southern (max y) boundary.
    """
    spacing = settings.distance_between
    width = spacing * (settings.columns + 1)
    height = spacing * (settings.rows + 1)

    network = RoadNetwork()

    def lane_offset(i: int) -> float:
        return settings.median_size / 2 + settings.lane_width * (i + 0.5)

    def add_pair(forward_id, forward_name, backward_id, backward_name, forward_spawn, backward_spawn):
        for road_id, name, dual_id, spawn in (
            (forward_id, forward_name, backward_id, forward_spawn),
            (backward_id, backward_name, forward_id, backward_spawn),
        ):
            lanes = [Lane(id=f"L-{road_id}-{i}", width=settings.lane_width)
                     for i in range(settings.lanes_per_road)]
            network.add_road(road_id, name=name, lanes=lanes, dual_id=dual_id)
            for i, lane in enumerate(lanes):
                network.add_spawn_point(f"S-{road_id}-{i}", lane.id, spawn(lane_offset(i)))

    for c in range(settings.columns):
        cx = spacing * (c + 1)
        add_pair(
            f"NB{c}", f"Column {c} Northbound",
            f"SB{c}", f"Column {c} Southbound",
            lambda off, cx=cx: Position(x=cx + off, y=height),
            lambda off, cx=cx: Position(x=cx - off, y=0.0),
        )

    for r in range(settings.rows):
        cy = spacing * (r + 1)
        add_pair(
            f"EB{r}", f"Row {r} Eastbound",
            f"WB{r}", f"Row {r} Westbound",
            lambda off, cy=cy: Position(x=0.0, y=cy + off),
            lambda off, cy=cy: Position(x=width, y=cy - off),
        )

    # Every road leaves the map at one of its ends
    network.set_destination_roads(r.id for r in network.roads)

    logger.info(
        "Built %dx%d grid: %d roads, %d spawn points",
        settings.columns, settings.rows, len(network.roads), len(network.spawn_points),
    )
    return network
