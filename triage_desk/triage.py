"""Patient tickets and the priority-ordered waiting queue."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional

from triage_desk.linked_list import LinkedList

MAX_PROBLEM_LENGTH = 255


class InvalidPriorityError(ValueError):
    """Raised when a priority name is not recognised."""


class TicketNotFoundError(LookupError):
    """Raised when no ticket has the requested ID."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(f"no ticket with ID {ticket_id}")
        self.ticket_id = ticket_id


class Priority(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Return the priority whose label is exactly text."""
        for priority in cls:
            if priority.label == text:
                return priority
        raise InvalidPriorityError(f"invalid priority: {text!r}")


_LABELS = {Priority.LOW: "Bajo", Priority.MEDIUM: "Medio", Priority.HIGH: "Alto"}


@dataclass
class Ticket:
    ticket_id: int
    problem: str
    registered_at: int
    priority: Priority = Priority.LOW


def lower_than(a: Ticket, b: Ticket) -> bool:
    """True when a must be served before b."""
    if a.priority > b.priority:
        return True
    return a.priority == b.priority and a.registered_at < b.registered_at


class TicketQueue:
    """Tickets waiting to be attended, served by priority then by time."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.time
        self._tickets = LinkedList()

    def __len__(self) -> int:
        return len(self._tickets)

    def _now(self) -> int:
        return int(self._clock())

    def register(self, ticket_id: int, problem: str) -> Ticket:
        ticket = Ticket(ticket_id, problem[:MAX_PROBLEM_LENGTH], self._now())
        self._tickets.push_back(ticket)
        return ticket

    def find(self, ticket_id: int) -> Ticket:
        for ticket in self._tickets:
            if ticket.ticket_id == ticket_id:
                return ticket
        raise TicketNotFoundError(ticket_id)

    def assign_priority(self, ticket_id: int, priority) -> Ticket:
        """Set a ticket's priority and restamp its registration time."""
        ticket = self.find(ticket_id)
        if isinstance(priority, str):
            priority = Priority.parse(priority)
        ticket.priority = Priority(priority)
        ticket.registered_at = self._now()
        return ticket

    def sort_by_priority(self) -> None:
        ordered = LinkedList()
        for ticket in self._tickets:
            ordered.sorted_insert(ticket, lower_than)
        self._tickets = ordered

    def waiting(self) -> List[Ticket]:
        self.sort_by_priority()
        return list(self._tickets)

    def pop_next(self) -> Ticket:
        """Remove and return the ticket to be attended next."""
        if not self._tickets:
            raise IndexError("no pending tickets")
        self.sort_by_priority()
        return self._tickets.pop_front()