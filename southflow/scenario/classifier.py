from typing import Dict, Sequence

from southflow.domain import config
from southflow.domain.models import SpawnClass, SpawnPoint

class SpawnPointClassifier:
    """Splits spawn points into south-facing entrances and the rest.

    Y grows downward, so the south boundary is the maximum Y. A spawn point
    is directional when its Y lies within ``margin_fraction`` of the Y range
    from that maximum.
    """

    def __init__(self, margin_fraction: float = config.SOUTH_MARGIN_FRACTION):
        if not 0.0 <= margin_fraction <= 1.0:
            raise ValueError(f"margin_fraction must be within [0, 1], got {margin_fraction}")
        self.margin_fraction = margin_fraction

    def threshold(self, spawn_points: Sequence[SpawnPoint]) -> float:
        if not spawn_points:
            raise ValueError("Cannot compute a threshold without spawn points")
        ys = [sp.position.y for sp in spawn_points]
        max_y, min_y = max(ys), min(ys)
        return max_y - (max_y - min_y) * self.margin_fraction

    def is_directional(self, spawn_point: SpawnPoint, spawn_points: Sequence[SpawnPoint]) -> bool:
        return spawn_point.position.y >= self.threshold(spawn_points)

    def classify(self, spawn_points: Sequence[SpawnPoint]) -> Dict[str, SpawnClass]:
        if not spawn_points:
            return {}
        threshold = self.threshold(spawn_points)
        return {
            sp.id: SpawnClass.DIRECTIONAL if sp.position.y >= threshold else SpawnClass.OTHER
            for sp in spawn_points
        }
