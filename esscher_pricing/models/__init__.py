"""Model exports."""

from .normal import NormalModel
from .nig import NIGModel
from .gamma import GammaModel
from .factory import MODEL_TYPES, make_model

__all__ = [
    "NormalModel",
    "NIGModel",
    "GammaModel",
    "MODEL_TYPES",
    "make_model",
]
