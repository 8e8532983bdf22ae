import enum
from dataclasses import dataclass
from typing import Callable, NamedTuple

from .array_store import ArrayStore

# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================
#
# Each algorithm is split into a setup and a step. The step does one
# outer-loop iteration and returns, so a caller can redraw between
# steps. Progress is carried in a Progress value, never in the store.


class Algorithm(enum.Enum):
    INSERTION_SORT = "Insertion Sort"
    PANCAKE_SORT   = "Pancake Sort"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class Progress:
    cursor: int
    done: bool = False


# ---------------------- Insertion sort ----------------------

def insertion_sort_setup(store: ArrayStore) -> Progress:
    return Progress(cursor=1, done=len(store) <= 1)


def insertion_sort_step(store: ArrayStore, progress: Progress) -> Progress:
    """
    Move store[cursor] into the sorted prefix [0, cursor).

    Shifts every strictly greater predecessor one slot right, so equal
    values keep their relative order.
    """
    assert not progress.done, "step called after the sort finished"
    i = progress.cursor
    assert 1 <= i < len(store), f"insertion cursor {i} out of range"

    arr   = store.values
    value = arr[i]
    j     = i
    while j >= 1 and arr[j - 1] > value:
        arr[j] = arr[j - 1]
        j -= 1
    arr[j] = value

    i += 1
    return Progress(cursor=i, done=i >= len(store))


# ----------------------- Pancake sort -----------------------

def find_max_index(store: ArrayStore, upper: int) -> int:
    """Lowest index holding the maximum of store[0:upper]."""
    arr = store.values
    mi  = 0
    for i in range(1, upper):
        if arr[i] > arr[mi]:
            mi = i
    return mi


def pancake_sort_setup(store: ArrayStore) -> Progress:
    return Progress(cursor=len(store), done=len(store) <= 1)


def pancake_sort_step(store: ArrayStore, progress: Progress) -> Progress:
    """
    Shrink the unsorted prefix [0, cursor) by one.

    The prefix maximum is flipped to the front and then to position
    cursor - 1, unless it is already there.
    """
    assert not progress.done, "step called after the sort finished"
    k = progress.cursor
    assert 1 < k <= len(store), f"pancake cursor {k} out of range"

    mi = find_max_index(store, k)
    if mi != k - 1:
        store.flip(mi)
        store.flip(k - 1)

    k -= 1
    return Progress(cursor=k, done=k <= 1)


# ------------------------- Dispatch -------------------------

class Strategy(NamedTuple):
    setup: Callable[[ArrayStore], Progress]
    step: Callable[[ArrayStore, Progress], Progress]


STRATEGIES = {
    Algorithm.INSERTION_SORT: Strategy(insertion_sort_setup, insertion_sort_step),
    Algorithm.PANCAKE_SORT:   Strategy(pancake_sort_setup,   pancake_sort_step),
}


def get_strategy(algorithm: Algorithm) -> Strategy:
    if algorithm in STRATEGIES: return STRATEGIES[algorithm]
    raise KeyError(f"Unknown algorithm: {algorithm}")


def run_to_completion(algorithm: Algorithm, store: ArrayStore) -> int:
    """Run one full sort without a display. Returns the number of steps."""
    strategy = get_strategy(algorithm)
    progress = strategy.setup(store)
    steps    = 0
    while not progress.done:
        progress = strategy.step(store, progress)
        steps += 1
    return steps
