"""
User Feedback Collaborators

The tracker needs two things from whatever presents it:
1. A way to show a transient success/error message (Notifier)
2. A way to ask the user a yes/no question (Confirmer)

How those look on screen is up to the presentation layer. The tracker only
depends on these interfaces.
"""

from abc import ABC, abstractmethod

from expense_tracker.models.expense import ConfirmationPrompt, Notification


class Notifier(ABC):
    """Receives notifications. Fire-and-forget: nothing is returned."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


class Confirmer(ABC):
    """Asks the user to confirm an action."""

    @abstractmethod
    async def confirm(self, prompt: ConfirmationPrompt) -> bool:
        """
        Put the prompt to the user.

        Returns:
            True if the user confirmed, False if they declined
        """
        pass


class CollectingNotifier(Notifier):
    """
    Keeps notifications in the order they were emitted.

    The Streamlit app drains it once per run to render toasts and errors.
    """

    def __init__(self):
        self._pending: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self._pending.append(notification)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and forget everything collected so far."""
        pending, self._pending = self._pending, []
        return pending


class StaticConfirmer(Confirmer):
    """Gives the same answer to every prompt and remembers what it was asked."""

    def __init__(self, answer: bool):
        self._answer = answer
        self.prompts: list[ConfirmationPrompt] = []

    async def confirm(self, prompt: ConfirmationPrompt) -> bool:
        self.prompts.append(prompt)
        return self._answer
