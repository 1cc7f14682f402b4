import os
import sys

import pytest

# Ensure repo root is on sys.path so tests can import the local `esscher_pricing` package
# regardless of pytest's import mode / rootdir heuristics.
_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from esscher_pricing import GammaModel, NIGModel, NormalModel  # noqa: E402


@pytest.fixture(params=["normal", "nig", "gamma"])
def any_model(request):
    if request.param == "normal":
        return NormalModel()
    if request.param == "nig":
        return NIGModel({"alpha": 3.0, "beta": -1.0})
    return GammaModel({"shape": 4.0})
