import json
import logging
import time
from southflow.domain.models import GridSettings, ProtocolSettings
from southflow.kernel.simulation_kernel import SimulationKernel

logger = logging.getLogger(__name__)

def run_headless_experiment(config_path: str, output_path: str):
    with open(config_path) as f:
        raw = json.load(f)

    seed = raw.get("seed", 42)
    duration_ticks = raw.get("duration_ticks", 1000)
    grid = GridSettings(**raw.get("grid", {}))
    protocol = ProtocolSettings(**raw.get("protocol", {}))

    kernel = SimulationKernel(grid, protocol)
    kernel.initialize(seed=seed)

    results = []

    start_time = time.time()
    for i in range(duration_ticks):
        before = kernel.state.spawned
        kernel.run_tick()
        results.append({
            "tick": i,
            "spawned": kernel.state.spawned - before,
        })

    end_time = time.time()
    logger.info("Experiment finished in %.4fs", end_time - start_time)

    with open(output_path, 'w') as f:
        json.dump({
            "scenario": kernel.state.report.model_dump(mode="json"),
            "destination_counts": kernel.state.destination_counts,
            "ticks": results,
        }, f, indent=2)

if __name__ == "__main__":
    import sys
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    if len(sys.argv) > 2:
        run_headless_experiment(sys.argv[1], sys.argv[2])
    else:
        print("Usage: python -m southflow.experiments.run_experiment <config.json> <output.json>")
