"""Solver host package: wraps the poker engine with a WebSocket request channel."""

from .server import SolverRequestError, SolverServer

__all__ = ["SolverRequestError", "SolverServer"]
