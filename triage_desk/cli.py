"""Interactive menu for the hospital triage queue."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import Optional, TextIO

from triage_desk.extra import PRESS_KEY_PROMPT, clear_screen, wait_for_key
from triage_desk.triage import (
    InvalidPriorityError,
    Ticket,
    TicketNotFoundError,
    TicketQueue,
)

MENU = (
    "========================================\n"
    "     Sistema de Gestion Hospitalaria\n"
    "========================================\n"
    "1) Registrar paciente\n"
    "2) Asignar prioridad a paciente\n"
    "3) Mostrar lista de espera\n"
    "4) Atender al siguiente paciente\n"
    "5) Mostrar pacientes por prioridad\n"
    "6) Salir\n"
)

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def format_ticket(ticket: Ticket) -> str:
    """Render a ticket's details, one field per line."""
    return (
        f"ID: {ticket.ticket_id}\n"
        f"Problema: {ticket.problem}\n"
        f"Prioridad: {ticket.priority.label}\n"
        f"Hora Registro: {time.ctime(ticket.registered_at)}\n"
    )


def _read_option(stdin: TextIO) -> Optional[str]:
    while True:
        line = stdin.readline()
        if not line:
            return None
        stripped = line.strip()
        if stripped:
            return stripped[0]


def _read_int(stdin: TextIO) -> Optional[int]:
    match = _INT_RE.match(stdin.readline())
    return int(match.group(1)) if match else None


def _register(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n--- Registrar nuevo paciente ---\n")
    stdout.write("ID: ")
    ticket_id = _read_int(stdin)
    if ticket_id is None:
        stdout.write("ID no valido.\n")
        return
    stdout.write("Describa el problema:")
    problem = stdin.readline().rstrip("\n")
    queue.register(ticket_id, problem)
    stdout.write("Paciente registrado con exito.\n")


def _assign_priority(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    if len(queue) == 0:
        stdout.write("No hay pacientes registrados.\n")
        return
    stdout.write("\nID del paciente a modificar: ")
    ticket_id = _read_int(stdin)
    try:
        ticket = queue.find(ticket_id)
    except TicketNotFoundError:
        stdout.write("Ticket no encontrado.\n")
        return
    stdout.write("Asigne una nueva prioridad al ticket (Bajo / Medio / Alto): ")
    words = stdin.readline().split()
    choice = words[0][:9] if words else ""
    try:
        queue.assign_priority(ticket.ticket_id, choice)
    except InvalidPriorityError:
        stdout.write(
            "Prioridad no valida. El ticket se mantiene con prioridad "
            f'"{ticket.priority.label}". Intente nuevamente.\n'
        )
        return
    stdout.write(f"\nPrioridad ACTUALIZADA a {choice}! Con exito!\n")


def _show_waiting(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Pacientes en espera: \n")
    if len(queue) == 0:
        stdout.write("No hay tickets registrados.\n")
        return
    stdout.write("\n=== Listado de Tickets ===\n")
    for number, ticket in enumerate(queue.waiting(), start=1):
        stdout.write(f"\nTicket #{number}\n")
        stdout.write(format_ticket(ticket))


def _attend_next(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    try:
        ticket = queue.pop_next()
    except IndexError:
        stdout.write("No hay tickets pendientes\n")
        return
    stdout.write("\n===Ticket con mayor prioridad===\n")
    stdout.write(format_ticket(ticket))


def _search(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Ingresar ID a buscar:")
    ticket_id = _read_int(stdin)
    try:
        ticket = queue.find(ticket_id)
    except TicketNotFoundError:
        stdout.write(
            "No se encontro ningun ticket con ese ID. "
            "Por favor, verifique e intente nuevamente.\n"
        )
        return
    stdout.write("\n=== Detalles del Ticket ===\n")
    stdout.write(f"Descripcion del problema: {ticket.problem}\n")
    stdout.write(f"Prioridad: {ticket.priority.label}\n")
    stdout.write(f"Hora de registro: {time.ctime(ticket.registered_at)}\n")


_ACTIONS = {
    "1": _register,
    "2": _assign_priority,
    "3": _show_waiting,
    "4": _attend_next,
    "5": _search,
}


def run(queue: TicketQueue, stdin: TextIO, stdout: TextIO) -> None:
    """Drive the menu until the user quits or input runs out."""
    while True:
        if stdout.isatty():
            clear_screen()
        stdout.write(MENU)
        stdout.write("Ingrese su opcion: ")
        option = _read_option(stdin)
        if option is None:
            return
        action = _ACTIONS.get(option)
        if action is not None:
            action(queue, stdin, stdout)
        elif option == "6":
            stdout.write("Saliendo del sistema de gestion hospitalaria...\n")
        else:
            stdout.write("Opcion no valida. Por favor, intente de nuevo.\n")
        stdout.write(PRESS_KEY_PROMPT + "\n")
        wait_for_key(stdin)
        if option == "6":
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="triage-desk", description="Hospital waiting-list manager."
    )
    parser.parse_args(argv)
    run(TicketQueue(), sys.stdin, sys.stdout)
    return 0