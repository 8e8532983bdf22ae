import json
import logging
import os
import sys
from dataclasses import dataclass, fields, replace

log = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

GRID_SIZE      = (120, 80)      # cells (x, y)
GRID_CELL_SIZE = 10             # pixels per cell side
WINDOW_WIDTH   = GRID_SIZE[0] * GRID_CELL_SIZE
WINDOW_HEIGHT  = GRID_SIZE[1] * GRID_CELL_SIZE
WINDOW_TITLE   = "Sorting Visualizer"

TARGET_FPS          = 60        # algorithm steps per second
RENDER_FPS          = 60        # frames drawn per second
MAX_TICKS_PER_FRAME = 10       # None replays every step that is due
ARRAY_SIZE          = 100
MAX_ARRAY_SIZE      = 500       # 2 px per bar across the bar area
SHUFFLE_ON_START    = True

BACKGROUND_COLOR = (0, 0, 0)
LABEL_COLOR      = (140, 140, 160)
ZONE_LINE_COLOR  = (38, 38, 58)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL  = "INFO"

# Looked up in the working directory when no path is given
SETTINGS_JSON = "sorting_visualizer.json"


@dataclass
class Settings:
    target_fps: float = TARGET_FPS
    array_size: int = ARRAY_SIZE
    shuffle_on_start: bool = SHUFFLE_ON_START
    max_ticks_per_frame: int | None = MAX_TICKS_PER_FRAME
    seed: int | None = None
    log_level: str = LOG_LEVEL

    def validate(self):
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")
        if not 0 <= self.array_size <= MAX_ARRAY_SIZE:
            raise ValueError(f"array_size must be in 0..{MAX_ARRAY_SIZE}, got {self.array_size}")
        if self.max_ticks_per_frame is not None and self.max_ticks_per_frame < 1:
            raise ValueError(f"max_ticks_per_frame must be >= 1 or null, got {self.max_ticks_per_frame}")
        return self


# Accepted JSON types per field; None marks a field that may be null
_FIELD_TYPES = {
    "target_fps":          (int, float),
    "array_size":          (int,),
    "shuffle_on_start":    (bool,),
    "max_ticks_per_frame": (int, None),
    "seed":                (int, None),
    "log_level":           (str,),
}


def _accepts(key: str, value) -> bool:
    types = _FIELD_TYPES[key]
    if value is None:
        return None in types
    if isinstance(value, bool):
        return bool in types
    return isinstance(value, tuple(t for t in types if t is not None))


# ============================================================
# ===================== SETTINGS JSON ========================
# ============================================================

def _read_settings_json(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return {}
    return data


def load_settings(path: str | None = None) -> Settings:
    """
    Build Settings from the defaults above, overridden by a JSON file.

    Unknown keys are reported and skipped. Values of the wrong type keep
    the default. Out-of-range values raise ValueError.
    """
    path = path or os.path.join(os.getcwd(), SETTINGS_JSON)
    data = _read_settings_json(path)
    known = {f.name for f in fields(Settings)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            log.warning("Unknown setting %r in %s", key, path)
            continue
        if not _accepts(key, value):
            log.warning("Ignoring setting %r: unexpected value %r", key, value)
            continue
        overrides[key] = value
    return replace(Settings(), **overrides).validate()


def configure_logging(level: str = LOG_LEVEL):
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
