"""Two-step execution for destructive actions.

Removing a logged exercise, deleting a past workout and finishing a workout
never happen directly. The backend hands out a :class:`PendingConfirmation`
and the UI runs it only after the user accepts the prompt.
"""

from __future__ import annotations

from typing import Any, Callable


class PendingConfirmation:
    """A deferred action plus the prompt shown before running it."""

    def __init__(
        self,
        title: str,
        message: str,
        confirm_label: str,
        action: Callable[[], Any],
    ) -> None:
        self.title = title
        self.message = message
        self.confirm_label = confirm_label
        self._action = action
        self.resolved = False

    def confirm(self) -> Any:
        """Run the action. A confirmation can only be used once."""
        if self.resolved:
            raise RuntimeError("Confirmation already resolved")
        self.resolved = True
        return self._action()

    def cancel(self) -> None:
        self.resolved = True

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"PendingConfirmation({self.title!r}, resolved={self.resolved})"
