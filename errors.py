"""Exceptions raised by the pathfinding benchmark."""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for every error this project raises on purpose."""


class UnknownAlgorithmError(PathfinderError, ValueError):
    """A caller asked for an algorithm key that is not registered."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown pathfinding algorithm: {key!r}")


class GenericError(PathfinderError):
    """Wraps a failure surfaced by a collaborator (I/O, parsing, ...)."""

    @classmethod
    def wrap(cls, exc: BaseException) -> "GenericError":
        err = cls(f"Generic Error: {exc}")
        err.__cause__ = exc
        return err
