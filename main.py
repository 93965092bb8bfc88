import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from models import BenchmarkResponse, RackStateResponse, SolveRequest
from rack_logic.constants import MAX_BENCHMARK_TRIALS
from rack_logic.session import RackSession, run_performance_test
from rack_logic.tiles import InvalidRackError, validate_rack
from rack_logic.word_list import WordList, initialize_word_list

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Scrabble Rack Word Finder")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"]
)

word_list: Optional[WordList] = None
rack_session: Optional[RackSession] = None


def get_word_list() -> WordList:
    global word_list
    if word_list is None:
        word_list = initialize_word_list()
    return word_list


def state_response(session: RackSession) -> RackStateResponse:
    state = session.get_state()
    return RackStateResponse(
        rack=state["rack"], blanks=state["blanks"],
        playable_words=state["playable_words"], columns=state["columns"],
        best_word=state["best_word"], best_points=state["best_points"],
        message=state["message"]
    )


@app.get("/api/rack/new", response_model=RackStateResponse, tags=["Rack"])
async def new_rack():
    global rack_session
    rack_session = RackSession(get_word_list())
    return state_response(rack_session)


@app.post("/api/rack/solve", response_model=RackStateResponse, tags=["Rack"])
async def solve_rack(request: SolveRequest):
    global rack_session
    try:
        rack = validate_rack(request.rack)
    except InvalidRackError as e:
        raise HTTPException(status_code=400, detail=str(e))

    rack_session = RackSession(get_word_list(), rack=rack)
    return state_response(rack_session)


@app.get("/api/rack/state", response_model=RackStateResponse, tags=["Rack"])
async def get_rack_state():
    if rack_session is None:
        raise HTTPException(status_code=404, detail="No rack drawn yet.")
    return state_response(rack_session)


@app.get("/api/rack/benchmark", response_model=BenchmarkResponse, tags=["Diagnostics"])
async def benchmark(trials: int = Query(10, ge=1, le=MAX_BENCHMARK_TRIALS)):
    timings = run_performance_test(get_word_list(), trials)
    return BenchmarkResponse(
        trials=trials, timings=timings,
        mean_seconds=sum(timings) / len(timings)
    )

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting rack word finder server...")
    get_word_list()
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
