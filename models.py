from pydantic import BaseModel
from typing import List, Optional


class SolveRequest(BaseModel):
    rack: str


class RackStateResponse(BaseModel):
    rack: List[str]
    blanks: int
    playable_words: List[str]
    columns: List[List[str]]
    best_word: Optional[str] = None
    best_points: int = 0
    message: Optional[str] = None


class BenchmarkResponse(BaseModel):
    trials: int
    timings: List[float]
    mean_seconds: float
