from typing import Hashable, Tuple


class NonExistentNodeError(ValueError):
    """Raised when an operation references a value that is not in the graph."""

    def __init__(self, *values: Hashable) -> None:
        self.values: Tuple[Hashable, ...] = values
        missing = ", ".join(str(value) for value in values)
        super().__init__(f"At least one of those nodes doesn't exist: {missing}")


class NoPathError(ValueError):
    """Raised when a search exhausts every reachable node without meeting the target."""

    def __init__(self, start: Hashable, end: Hashable) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No path exists between {start} and {end}.")
