"""Domain primitives shared by the organizer core."""

from .result import Result, Success, Failure, try_catch

__all__ = ["Result", "Success", "Failure", "try_catch"]
