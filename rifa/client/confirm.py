"""Two-stage confirmation gate for destroying the raffle."""

from __future__ import annotations

from typing import Protocol

from .errors import ConfirmationAborted

RESET_PHRASE = "deseo reiniciar la rifa"


class Confirmation(Protocol):
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""

    def prompt(self, message: str) -> str | None:
        """Ask for free text; ``None`` means the user cancelled."""


def require_reset_confirmation(confirmation: Confirmation, participant_count: int) -> None:
    """Raise ConfirmationAborted unless the user confirms and types RESET_PHRASE."""
    question = f"¿Estás seguro de que quieres reiniciar la rifa? Se borrarán {participant_count} participantes."
    if not confirmation.confirm(question):
        raise ConfirmationAborted("Reset cancelled")

    typed = confirmation.prompt(f'Escribe "{RESET_PHRASE}" para confirmar:')
    if typed != RESET_PHRASE:
        raise ConfirmationAborted("Confirmation phrase did not match")


class ConsoleConfirmation:
    def confirm(self, message: str) -> bool:
        answer = self.prompt(f"{message} [s/N]")
        return answer is not None and answer.strip().lower() in {"s", "si", "sí", "y", "yes"}

    def prompt(self, message: str) -> str | None:
        try:
            return input(f"{message} ")
        except EOFError:
            return None
