import asyncio
import time
from fastapi import FastAPI, HTTPException
from typing import List
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from southflow.kernel.simulation_kernel import SimulationKernel
from southflow.domain.errors import LaneNotInAnyRoad, NoEligibleDestination
from southflow.domain.models import (
    DestinationChoice, Road, ScenarioReport, ScenarioState, SpawnClass, SpawnPointSummary
)

# Initialize Kernel
kernel = SimulationKernel()

# Background task for simulation loop
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the scenario and start ticking
    kernel.initialize() # Deterministic seed
    loop_task = asyncio.create_task(run_simulation())
    yield
    # Shutdown
    loop_task.cancel()

app = FastAPI(lifespan=lifespan)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def tick_interval() -> float:
    # One kernel step per wall-clock step keeps simulated time at 1x
    return kernel.dt

async def run_simulation():
    """Runs the spawn loop in real time (~50Hz for the default 0.02s step)"""
    dt = tick_interval()

    while True:
        start_time = time.time()
        kernel.run_tick()
        elapsed = time.time() - start_time
        await asyncio.sleep(max(0.0, dt - elapsed))

def _network():
    if not kernel.initialized:
        kernel.initialize()
    return kernel.state.road_network

@app.get("/api/scenario", response_model=ScenarioReport)
async def get_scenario():
    """Returns the classification and wiring of the current scenario"""
    _network()
    return kernel.state.report

@app.get("/api/spawn-points", response_model=List[SpawnPointSummary])
async def get_spawn_points():
    """Returns every spawn point with its class and traffic rate"""
    network = _network()
    classification = kernel.state.report.classification
    summary = []
    for sp in network.spawn_points:
        lane = network.get_lane(sp.lane_id)
        road = network.get_road(lane) if lane else None
        summary.append({
            "id": sp.id,
            "x": sp.position.x,
            "y": sp.position.y,
            "laneId": sp.lane_id,
            "roadId": road.id if road else None,
            "spawnClass": classification.get(sp.id, SpawnClass.OTHER),
            "rate": sp.generator.rate,
        })
    return summary

@app.get("/api/destinations", response_model=List[Road])
async def get_destinations():
    """Returns the eligible destination roads"""
    return _network().destination_roads

@app.get("/api/state", response_model=ScenarioState)
async def get_state():
    """Returns spawn totals and the most recent vehicles"""
    return kernel.get_state()

@app.get("/api/lanes/{lane_id}/destination", response_model=DestinationChoice)
async def sample_destination(lane_id: str):
    """Draws one destination for a vehicle leaving the given lane"""
    network = _network()
    lane = network.get_lane(lane_id)
    if lane is None:
        raise HTTPException(status_code=404, detail="Lane not found")
    sp = next((s for s in network.spawn_points if s.lane_id == lane_id), None)
    if sp is None:
        raise HTTPException(status_code=404, detail="Lane has no spawn point")
    try:
        road = network.require_road(lane)
        destination = sp.generator.selector.select_destination(lane)
        return DestinationChoice(
            lane_id=lane.id,
            current_road_id=road.id,
            destination_road_id=destination.id,
        )
    except LaneNotInAnyRoad as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NoEligibleDestination as e:
        raise HTTPException(status_code=409, detail=str(e))

@app.get("/")
def read_root():
    return {"status": "SouthFlow Scenario Backend Running (South-Only Protocol)"}
