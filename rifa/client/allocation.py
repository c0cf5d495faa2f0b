"""Synchronization between the local board and the participant server."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from .confirm import Confirmation, require_reset_confirmation
from .errors import BusyError, ConfirmationAborted, NetworkError, RejectionError, ValidationError
from .pool import MAX_NUMBERS_PER_PARTICIPANT, NumberPool, is_valid_number
from .selection import SelectionBuffer

logger = logging.getLogger(__name__)


class SubmitState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    RESETTING = "resetting"


def validate_claim(name: str, numbers: list[int] | tuple[int, ...]) -> tuple[str, list[int]]:
    clean_name = name.strip() if isinstance(name, str) else ""
    if clean_name == "":
        raise ValidationError("Name is required")
    if not numbers:
        raise ValidationError("Select at least one number")
    if len(numbers) > MAX_NUMBERS_PER_PARTICIPANT:
        raise ValidationError(f"At most {MAX_NUMBERS_PER_PARTICIPANT} numbers per participant")
    if len(set(numbers)) != len(numbers):
        raise ValidationError("Numbers must be distinct")
    for number in numbers:
        if not is_valid_number(number):
            raise ValidationError(f"Number {number!r} is outside the pool")
    return clean_name, list(numbers)


def _rejection_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return response.reason_phrase or f"HTTP {response.status_code}"


class AllocationClient:
    """The only component that changes server state.

    Every successful mutation is followed by a full refetch; the local pool is
    never patched with a guess of what the server stored.
    """

    def __init__(
        self,
        base_url: str,
        pool: NumberPool | None = None,
        selection: SelectionBuffer | None = None,
        confirmation: Confirmation | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.pool = pool if pool is not None else NumberPool()
        self.selection = selection if selection is not None else SelectionBuffer()
        self.confirmation = confirmation
        self.state = SubmitState.IDLE
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(base_url=base_url, timeout=timeout_s)

    async def __aenter__(self) -> AllocationClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    @property
    def busy(self) -> bool:
        return self.state in (SubmitState.SUBMITTING, SubmitState.RESETTING)

    def can_submit(self, name: str) -> bool:
        return not self.busy and bool(name.strip()) and len(self.selection) > 0

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"Could not reach the raffle server ({exc.__class__.__name__})") from exc

    async def fetch_all(self) -> NumberPool:
        response = await self._request("GET", "/participants")
        if not response.is_success:
            logger.error("GET /participants answered %d", response.status_code)
            raise NetworkError(f"Server answered {response.status_code} while loading participants")
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("GET /participants returned invalid JSON: %s", exc)
            raise NetworkError("Server sent an unreadable participant list") from exc
        if not isinstance(data, list):
            logger.error("GET /participants returned %s instead of a list", type(data).__name__)
            raise NetworkError("Server sent an unreadable participant list")

        self.pool.rebuild(data)
        dropped = self.selection.prune(self.pool)
        if dropped:
            logger.info("Dropped numbers taken by others from the selection: %s", dropped)
        return self.pool

    async def submit(self, name: str, numbers: list[int] | None = None) -> NumberPool:
        if self.busy:
            raise BusyError("A request is already in progress")

        self.state = SubmitState.VALIDATING
        try:
            clean_name, claim = validate_claim(name, list(self.selection.numbers) if numbers is None else numbers)
        except ValidationError:
            self.state = SubmitState.IDLE
            raise

        self.state = SubmitState.SUBMITTING
        try:
            response = await self._request("POST", "/participants", json={"name": clean_name, "numbers": claim})
            if not response.is_success:
                message = _rejection_message(response)
                logger.info("Claim by %r rejected: %s", clean_name, message)
                raise RejectionError(message, status_code=response.status_code)
            logger.info("Claim by %r accepted: %s", clean_name, claim)
            try:
                await self.fetch_all()
            finally:
                self.selection.clear()
        finally:
            self.state = SubmitState.IDLE
        return self.pool

    async def reset(self, confirmation: Confirmation | None = None) -> NumberPool:
        """Clear the raffle on the server.

        The participant count is read from a fresh listing, never from the
        cached pool, so a stale client cannot skip the confirmation gate.
        """
        if self.busy:
            raise BusyError("A request is already in progress")

        self.state = SubmitState.RESETTING
        try:
            await self.fetch_all()
            participant_count = len(self.pool.participants)
            if participant_count > 0:
                gate = confirmation if confirmation is not None else self.confirmation
                if gate is None:
                    raise ConfirmationAborted("No way to confirm the reset")
                require_reset_confirmation(gate, participant_count)

            response = await self._request("DELETE", "/reset")
            if not response.is_success:
                raise RejectionError(_rejection_message(response), status_code=response.status_code)
            logger.info("Raffle reset (%d participants removed)", participant_count)
            await self.fetch_all()
            self.selection.clear()
        finally:
            self.state = SubmitState.IDLE
        return self.pool
