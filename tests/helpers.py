from southflow.domain.graph import RoadNetwork
from southflow.domain.models import Lane, Position

def two_way_network(pairs=(("A", "B"), ("C", "D")), destinations=None):
    """One lane and one spawn point per road; each pair are duals."""
    network = RoadNetwork()
    for fwd, back in pairs:
        for road_id, dual_id in ((fwd, back), (back, fwd)):
            network.add_road(road_id, lanes=[Lane(id=f"L-{road_id}")], dual_id=dual_id)
            network.add_spawn_point(f"S-{road_id}", f"L-{road_id}", Position(x=0.0, y=0.0))
    if destinations is None:
        destinations = [r.id for r in network.roads]
    network.set_destination_roads(destinations)
    return network

def spawn_row_network(ys):
    """A network whose spawn points sit at the given Y coordinates."""
    network = RoadNetwork()
    for i, y in enumerate(ys):
        network.add_road(f"R{i}", lanes=[Lane(id=f"L-R{i}")])
        network.add_spawn_point(f"S{i}", f"L-R{i}", Position(x=float(i), y=float(y)))
    network.set_destination_roads(r.id for r in network.roads)
    return network
