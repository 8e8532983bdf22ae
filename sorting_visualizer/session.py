import enum
import logging

from .array_store import ArrayStore
from .input_router import Command
from .strategies import Algorithm, Progress, get_strategy

log = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE          = "idle"
    SETUP_PENDING = "setup pending"
    RUNNING       = "running"


_SELECTIONS = {
    Command.SELECT_INSERTION_SORT: Algorithm.INSERTION_SORT,
    Command.SELECT_PANCAKE_SORT:   Algorithm.PANCAKE_SORT,
}


class SortSession:
    """
    Drives one ArrayStore through Idle -> SetupPending -> Running -> Idle.

    Every tick does at most one thing: run the active algorithm's setup,
    run one of its steps, or nothing while idle. Commands are accepted
    only while idle, so a sort in progress always runs to the end.
    """

    def __init__(self, store: ArrayStore, algorithm: Algorithm = Algorithm.PANCAKE_SORT):
        self.store            = store
        self.phase            = Phase.IDLE
        self.active_algorithm = algorithm
        self.progress: Progress | None = None
        self.steps_taken      = 0
        self.sorts_completed  = 0

    @property
    def is_idle(self) -> bool:
        return self.phase is Phase.IDLE

    @property
    def is_sorting(self) -> bool:
        return not self.is_idle

    # ---------------------- Commands ----------------------

    def select(self, algorithm: Algorithm) -> bool:
        if not self.is_idle:
            return False
        self.active_algorithm = algorithm
        self.phase = Phase.SETUP_PENDING
        return True

    def shuffle(self) -> bool:
        if not self.is_idle:
            return False
        self.store.shuffle()
        return True

    def handle(self, command: Command) -> bool:
        if not self.is_idle:
            log.debug("Ignoring %s while %s", command.name, self.phase.value)
            return False
        log.info(command.value)
        if command is Command.SHUFFLE:
            return self.shuffle()
        return self.select(_SELECTIONS[command])

    # ----------------------- Ticks ------------------------

    def advance(self) -> bool:
        """Consume one tick. Returns False if the session was idle."""
        if self.phase is Phase.SETUP_PENDING:
            self.progress    = get_strategy(self.active_algorithm).setup(self.store)
            self.steps_taken = 0
            self.phase       = Phase.RUNNING
            if self.progress.done:
                self._finish()
            return True
        if self.phase is Phase.RUNNING:
            self.progress = get_strategy(self.active_algorithm).step(self.store, self.progress)
            self.steps_taken += 1
            if self.progress.done:
                self._finish()
            return True
        return False

    def advance_many(self, ticks: int) -> int:
        return sum(1 for _ in range(ticks) if self.advance())

    def _finish(self):
        self.phase    = Phase.IDLE
        self.progress = None
        self.sorts_completed += 1
        log.info("%s finished in %d steps",
                 self.active_algorithm.display_name, self.steps_taken)
