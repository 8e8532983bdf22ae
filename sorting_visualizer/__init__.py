from .array_store import ArrayStore
from .clock import FrameClock
from .colors import Gradient, value_to_color
from .input_router import Command, route_click
from .session import Phase, SortSession
from .strategies import Algorithm, Progress, run_to_completion

__version__ = "0.1.0"
