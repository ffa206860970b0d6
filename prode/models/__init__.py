from .match import Match
from .prediction import Prediction, PredictionRead
from .settings import ProdeSettings

__all__ = [
    "Match",
    "Prediction",
    "PredictionRead",
    "ProdeSettings",
]
