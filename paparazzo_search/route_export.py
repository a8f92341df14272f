# region Imports
from __future__ import annotations
import json
import logging
from typing import Any, Dict

from .path import NOT_FOUND
# endregion

logger = logging.getLogger(__name__)


# region Grid Path Export
def path_to_dict(path) -> Dict[str, Any]:
    """``{"positions": [{"row": r, "col": c}, ...], "length": n}`` for a grid path."""
    if path is NOT_FOUND:
        raise ValueError("cannot export NOT_FOUND; the search found no path")
    positions = [{"row": int(r), "col": int(c)} for r, c in path]
    return {"positions": positions, "length": len(positions)}


def write_path_json(path, out_path: str = "route.json") -> str:
    data = path_to_dict(path)
    with open(out_path, "w") as f:
        json.dump(data, f, indent=2)
    logger.info("Wrote %d points to %s", data["length"], out_path)
    return out_path
# endregion
