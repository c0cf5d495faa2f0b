"""Terminal front-end for the raffle board."""

from __future__ import annotations

import argparse
import asyncio
import logging
import subprocess
import sys
import time
from pathlib import Path

from urllib import error, request

from rifa.client.allocation import AllocationClient
from rifa.client.config import ClientSettings, load_settings
from rifa.client.confirm import ConsoleConfirmation
from rifa.client.errors import (
    BusyError,
    ConfirmationAborted,
    NetworkError,
    RejectionError,
    SnapshotError,
    ValidationError,
)
from rifa.client.pool import NumberPool
from rifa.client.presentation import board_stats, describe_board, format_number, render_participants, render_text_grid

ROOT_DIR = Path(__file__).resolve().parents[2]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sistema de Rifas")
    parser.add_argument("--server", default=None, help="participant server URL (default: RIFA_SERVER_URL)")
    parser.add_argument("--verbose", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="run the participant server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    commands.add_parser("board", help="show the number grid and participants")

    claim = commands.add_parser("claim", help="claim up to three numbers for a participant")
    claim.add_argument("name")
    claim.add_argument("numbers", nargs="+", type=int)

    commands.add_parser("reset", help="remove every participant")

    export = commands.add_parser("export", help="save the grid as rifa-<date>.png")
    export.add_argument("--out", type=Path, default=None)
    return parser.parse_args(argv)


def wait_for_server(server_url: str, timeout_s: float = 8.0) -> bool:
    start = time.time()
    while time.time() - start < timeout_s:
        try:
            with request.urlopen(f"{server_url}/health", timeout=0.5) as response:
                if int(response.status) < 500:
                    return True
        except (error.URLError, TimeoutError):
            pass
        time.sleep(0.2)
    return False


def run_server(host: str, port: int) -> int:
    command = [
        sys.executable,
        "-m",
        "uvicorn",
        "rifa.backend.api:app",
        "--host",
        host,
        "--port",
        str(port),
    ]
    return subprocess.call(command, cwd=str(ROOT_DIR))


def print_board(pool: NumberPool, client: AllocationClient) -> None:
    stats = board_stats(pool)
    print(render_text_grid(describe_board(pool, client.selection)))
    print()
    print(
        f"Participantes: {stats.participants}  Vendidos: {stats.sold}  "
        f"Disponibles: {stats.available}  Progreso: {stats.progress_percent}%"
    )
    if pool.participants:
        print()
        print(render_participants(pool))


async def show_board(client: AllocationClient) -> None:
    pool = await client.fetch_all()
    print_board(pool, client)


def _owned_by(pool: NumberPool, number: int, name: str) -> bool:
    owner = pool.owner_of(number)
    return owner is not None and owner.name == name


async def claim_numbers(client: AllocationClient, name: str, numbers: list[int]) -> None:
    await client.fetch_all()
    for number in numbers:
        if not client.selection.toggle(number, client.pool):
            owner = client.pool.owner_of(number)
            if owner is not None:
                print(f"{format_number(number)} ya es de {owner.name}, se omite", file=sys.stderr)
            else:
                print(f"{format_number(number)} no se puede seleccionar, se omite", file=sys.stderr)
    claim = list(client.selection.numbers)
    clean_name = name.strip()
    pool = await client.submit(name)
    confirmed = [format_number(number) for number in claim if _owned_by(pool, number, clean_name)]
    print(f"{clean_name} registrado con: {' '.join(confirmed)}")


async def reset_raffle(client: AllocationClient) -> None:
    await client.reset(ConsoleConfirmation())
    print("Rifa reiniciada")


async def export_board(client: AllocationClient, settings: ClientSettings, out_dir: Path | None) -> None:
    from rifa.client.snapshot import export_snapshot

    await client.fetch_all()
    path = export_snapshot(client.pool, client.selection, out_dir if out_dir is not None else settings.snapshot_dir)
    print(f"Imagen guardada en {path}")


async def run_command(args: argparse.Namespace, settings: ClientSettings) -> None:
    server_url = (args.server or settings.server_url).rstrip("/")
    pool = NumberPool(collision_policy=settings.collision_policy)
    async with AllocationClient(server_url, pool=pool, timeout_s=settings.timeout_s) as client:
        if args.command == "board":
            await show_board(client)
        elif args.command == "claim":
            await claim_numbers(client, args.name, args.numbers)
        elif args.command == "reset":
            await reset_raffle(client)
        elif args.command == "export":
            await export_board(client, settings, args.out)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()

    if args.command == "serve":
        from rifa.backend.config import load_settings as load_backend_settings

        backend = load_backend_settings()
        return run_server(args.host or backend.host, args.port or backend.port)

    server_url = (args.server or settings.server_url).rstrip("/")
    if not wait_for_server(server_url, timeout_s=settings.timeout_s):
        print(f"Servidor no disponible en {server_url}. Inícialo con 'rifa serve'.", file=sys.stderr)
        return 1

    try:
        asyncio.run(run_command(args, settings))
    except ValidationError as exc:
        print(f"Nada que enviar: {exc}", file=sys.stderr)
        return 1
    except RejectionError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except ConfirmationAborted:
        print("La rifa no se reinició", file=sys.stderr)
        return 1
    except (NetworkError, BusyError, SnapshotError) as exc:
        print(f"No se pudo completar la operación: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
