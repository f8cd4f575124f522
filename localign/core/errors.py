from __future__ import annotations


class AlignmentError(Exception):
    """Base class for every failure reported by localign."""


class InvalidSequenceError(AlignmentError, ValueError):
    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class ResourceExceededError(AlignmentError):
    def __init__(self, cells: int, max_cells: int) -> None:
        super().__init__(
            f"scoring matrix would need {cells} cells, more than the configured ceiling of {max_cells}"
        )
        self.cells = cells
        self.max_cells = max_cells


class ConfigError(AlignmentError, ValueError):
    pass
