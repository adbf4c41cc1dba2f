"""
Error taxonomy for the scheduling service.

Business errors (validation, not found, conflict) carry a short ``reason`` code
and a human readable message. Infrastructure errors (storage, directory) are
server faults; their message is logged but never sent back to the client.
"""

from typing import Optional


class ScheduleError(Exception):
    reason: str = "error"
    message: str = "Scheduling error"

    def __init__(self, reason: Optional[str] = None, message: Optional[str] = None):
        self.reason = reason or self.reason
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ScheduleError):
    reason = "invalid"
    message = "Invalid input"


class NotFoundError(ScheduleError):
    reason = "not-found"
    message = "Resource not found"


class ConflictError(ScheduleError):
    reason = "conflict"
    message = "Request conflicts with the current schedule"


class StorageError(ScheduleError):
    reason = "storage"
    message = "Storage failure"


class DirectoryUnavailableError(ScheduleError):
    reason = "directory-unavailable"
    message = "Employee directory unavailable"
