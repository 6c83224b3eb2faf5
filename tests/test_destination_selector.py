import random
import unittest
from collections import Counter

from southflow.domain.errors import EmptyDestinationSet, NoEligibleDestination
from southflow.domain.graph import RoadNetwork
from southflow.domain.models import Lane
from southflow.scenario.destination import DualExcludingDestinationSelector
from tests.helpers import two_way_network

class TestDualExclusion(unittest.TestCase):
    def test_never_returns_dual(self):
        network = two_way_network()
        lane = network.get_lane("L-A")
        for seed in range(20):
            selector = DualExcludingDestinationSelector(network, random.Random(seed))
            for _ in range(200):
                self.assertNotEqual(selector.select_destination(lane).id, "B")

    def test_uniform_over_remaining_roads(self):
        network = two_way_network()
        selector = DualExcludingDestinationSelector(network, random.Random(7))
        lane = network.get_lane("L-A")
        trials = 30000
        counts = Counter(selector.select_destination(lane).id for _ in range(trials))

        self.assertEqual(set(counts), {"A", "C", "D"})
        for road_id in ("A", "C", "D"):
            self.assertAlmostEqual(counts[road_id] / trials, 1 / 3, delta=0.03)

    def test_road_without_dual_can_reach_everything(self):
        network = two_way_network()
        network.add_road("X", lanes=[Lane(id="L-X")])
        network.set_destination_roads(["A", "B", "X"])
        selector = DualExcludingDestinationSelector(network, random.Random(1))
        lane = network.get_lane("L-X")
        seen = {selector.select_destination(lane).id for _ in range(300)}
        self.assertEqual(seen, {"A", "B", "X"})

class TestDegenerateNetworks(unittest.TestCase):
    def test_only_destination_is_the_dual(self):
        network = two_way_network(destinations=["B"])
        selector = DualExcludingDestinationSelector(network, random.Random(0))
        with self.assertRaises(NoEligibleDestination) as ctx:
            selector.select_destination(network.get_lane("L-A"))
        self.assertEqual(ctx.exception.lane_id, "L-A")
        self.assertEqual(ctx.exception.current_road_id, "A")

    def test_single_destination_that_is_not_the_dual(self):
        network = two_way_network(destinations=["B"])
        selector = DualExcludingDestinationSelector(network, random.Random(0))
        self.assertEqual(selector.select_destination(network.get_lane("L-B")).id, "B")

    def test_empty_destination_set(self):
        network = two_way_network(destinations=[])
        with self.assertRaises(EmptyDestinationSet):
            DualExcludingDestinationSelector(network)

    def test_candidates_for_lane(self):
        network = two_way_network()
        selector = DualExcludingDestinationSelector(network)
        ids = [r.id for r in selector.candidates_for(network.get_lane("L-C"))]
        self.assertEqual(ids, ["A", "B", "C"])

class TestUnknownLane(unittest.TestCase):
    def test_unmatched_lane_uses_full_set_and_is_reported(self):
        network = two_way_network()
        selector = DualExcludingDestinationSelector(network, random.Random(3))
        ghost = Lane(id="L-ghost")

        with self.assertLogs("southflow.scenario.destination", level="WARNING") as logs:
            choice = selector.choose(ghost)
        self.assertIn("LaneNotInAnyRoad", logs.output[0])
        self.assertFalse(choice.lane_matched)
        self.assertIsNone(choice.current_road_id)

        with self.assertLogs("southflow.scenario.destination", level="WARNING"):
            seen = {selector.select_destination(ghost).id for _ in range(300)}
        self.assertEqual(seen, {"A", "B", "C", "D"})

    def test_matched_lane_choice(self):
        network = two_way_network()
        selector = DualExcludingDestinationSelector(network, random.Random(3))
        choice = selector.choose(network.get_lane("L-D"))
        self.assertTrue(choice.lane_matched)
        self.assertEqual(choice.current_road_id, "D")
        self.assertNotEqual(choice.destination_road_id, "C")

    def test_selection_does_not_touch_network(self):
        network = two_way_network()
        before = [r.model_dump() for r in network.roads]
        selector = DualExcludingDestinationSelector(network, random.Random(5))
        for _ in range(50):
            selector.select_destination(network.get_lane("L-A"))
        self.assertEqual([r.model_dump() for r in network.roads], before)

if __name__ == '__main__':
    unittest.main()
