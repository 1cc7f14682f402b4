"""Option valuation on Esscher-tilted forwards: package exports."""

from .base_model import TiltingModel
from .models import (
    GammaModel,
    MODEL_TYPES,
    NIGModel,
    NormalModel,
    make_model,
)
from .numerics import NaN, common_dtype, erf_as, normal_cdf_as
from .valuation import (
    asset_call,
    asset_put,
    call,
    digital_call,
    digital_put,
    european_price,
    moneyness,
    put,
)

__all__ = [
    # Base
    "TiltingModel",
    # Models
    "NormalModel",
    "NIGModel",
    "GammaModel",
    "MODEL_TYPES",
    "make_model",
    # Valuation
    "moneyness",
    "put",
    "call",
    "european_price",
    "digital_put",
    "digital_call",
    "asset_put",
    "asset_call",
    # Numerics
    "NaN",
    "common_dtype",
    "erf_as",
    "normal_cdf_as",
]
