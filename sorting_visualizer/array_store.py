import random


class ArrayStore:
    """
    The sequence being sorted.

    The list in `values` is created once and only ever reordered in place,
    so a renderer may hold on to it between frames.
    """

    def __init__(self, values, seed=None):
        self.values = list(values)
        self._rng   = random.Random(seed)

    @classmethod
    def identity(cls, n: int = 100, seed=None):
        return cls(range(1, n + 1), seed=seed)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, i):
        return self.values[i]

    def __setitem__(self, i, value):
        self.values[i] = value

    def __iter__(self):
        return iter(self.values)

    def __repr__(self):
        return f"ArrayStore({self.values!r})"

    def shuffle(self):
        self._rng.shuffle(self.values)

    def swap(self, i: int, j: int):
        arr = self.values
        arr[i], arr[j] = arr[j], arr[i]

    def flip(self, upper: int):
        """Reverse the prefix [0, upper] in place."""
        lo, hi = 0, upper
        while lo < hi:
            self.swap(lo, hi)
            lo += 1; hi -= 1

    def is_sorted(self) -> bool:
        arr = self.values
        return all(arr[i] <= arr[i + 1] for i in range(len(arr) - 1))
