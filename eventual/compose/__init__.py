from .concurrent import concurrent, concurrent_all
from .pipeline import pipeline, stage
from .sequential import sequential, then

__all__ = (
    # Sequential
    "then",
    "sequential",
    # Concurrent
    "concurrent",
    "concurrent_all",
    # Pipeline
    "stage",
    "pipeline",
)
