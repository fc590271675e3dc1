"""Exceptions raised by the Hanoi solver."""


class HanoiError(Exception):
    """Base class for all solver errors."""


class MalformedPuzzleError(HanoiError, ValueError):
    """Puzzle parameters or configurations are not well-formed."""


class IllegalMoveError(HanoiError, ValueError):
    """A move violates the disk placement rules."""


class UnreachableGoalError(HanoiError, RuntimeError):
    """BFS exhausted the frontier without settling the goal configuration."""


class ConfigurationNotFoundError(HanoiError, LookupError):
    """No vertex was ever created for the requested configuration."""


class PathReconstructionError(HanoiError, RuntimeError):
    """Predecessor chain disagrees with the distance reported by the search."""


class InvalidStateTransitionError(HanoiError, RuntimeError):
    """A vertex visit state was moved backwards or skipped a step."""


class SearchLimitExceededError(HanoiError, RuntimeError):
    """The search created more vertices than the caller allowed."""
