class ScenarioError(Exception):
    """Base class for scenario setup and routing failures."""


class NoEligibleDestination(ScenarioError):
    """No destination road exists other than the dual of the current road."""

    def __init__(self, lane_id: str, current_road_id=None):
        self.lane_id = lane_id
        self.current_road_id = current_road_id
        super().__init__(
            f"No eligible destination for lane {lane_id} "
            f"(current road {current_road_id})"
        )


class LaneNotInAnyRoad(ScenarioError):
    """The lane is not listed by any road of the network."""

    def __init__(self, lane_id: str):
        self.lane_id = lane_id
        super().__init__(f"Lane {lane_id} does not belong to any road")


class EmptyDestinationSet(ScenarioError):
    """The network exposes no destination roads at all."""

    def __init__(self):
        super().__init__("Network has no destination roads")
