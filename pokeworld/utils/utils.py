import logging
import math
import random
from pathlib import Path
from typing import Any

import yaml

from pokeworld.constants import METERS_PER_DEGREE

LOGGER = logging.getLogger(__name__)


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    with file_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    LOGGER.info("Loaded YAML file: %s", str(file_path))
    return data or {}


def planar_distance_meters(d_lat: float, d_lng: float) -> int:
    # Flat approximation, one degree is treated as 111 km on both axes.
    return round(math.sqrt(d_lat * d_lat + d_lng * d_lng) * METERS_PER_DEGREE)


def random_offset(rng: random.Random, spread: float) -> tuple[float, float]:
    return rng.uniform(-spread, spread), rng.uniform(-spread, spread)
