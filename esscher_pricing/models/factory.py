"""Configuration-driven model construction."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from ..base_model import TiltingModel
from .gamma import GammaModel
from .nig import NIGModel
from .normal import NormalModel

logger = logging.getLogger(__name__)

MODEL_TYPES: Dict[str, type] = {
    "normal": NormalModel,
    "nig": NIGModel,
    "gamma": GammaModel,
}


def make_model(config: Any) -> TiltingModel:
    """Build a tilting model from a config entry.

    Accepted forms:
        "normal"
        ("nig", {"alpha": 2.0, "beta": -0.5})
        {"type": "gamma", "params": {"shape": 4.0}}
    An existing :class:`TiltingModel` is returned unchanged.
    """
    if isinstance(config, TiltingModel):
        return config
    if isinstance(config, str):
        config = {"type": config, "params": {}}
    elif isinstance(config, (list, tuple)) and len(config) == 2:
        config = {"type": config[0], "params": config[1]}
    if not isinstance(config, Mapping):
        raise ValueError("Model config must be a name, a (type, params) tuple, or a dict")

    mtype = str(config.get("type", "")).lower().strip()
    params = config.get("params", {})
    if mtype not in MODEL_TYPES:
        raise ValueError(f"Unsupported model type: {mtype}. Supported: {sorted(MODEL_TYPES)}")
    if not isinstance(params, Mapping):
        raise ValueError("config['params'] must be a dict")

    logger.debug("Building %s model from config", mtype)
    return MODEL_TYPES[mtype](dict(params))
