from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from kriptocalc.classical import register_all
from kriptocalc.core.errors import CipherError
from kriptocalc.core.history import DEFAULT_CAPACITY, HistoryError, RunHistory
from kriptocalc.core.registry import decrypt_known, encrypt_known, get_plugin, list_plugins

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = Path.home() / ".kriptocalc" / "history.json"

app = typer.Typer(help="kriptocalc: classical cipher calculator (Vigenere, Affine, Playfair, Hill, Enigma).")
history_app = typer.Typer(help="Inspect or edit the log of past runs.")
app.add_typer(history_app, name="history")


@app.callback()
def _init(
    ctx: typer.Context,
    history_file: Path = typer.Option(
        DEFAULT_HISTORY_FILE,
        "--history-file",
        envvar="KRIPTOCALC_HISTORY",
        help="JSON file holding the run history.",
    ),
    history_size: int = typer.Option(
        DEFAULT_CAPACITY,
        "--history-size",
        envvar="KRIPTOCALC_HISTORY_SIZE",
        min=1,
        help="Keep at most this many runs.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    # Register plugins exactly once per CLI run
    register_all()
    ctx.obj = {"history_file": history_file, "history_size": history_size}


def _load_history(ctx: typer.Context) -> RunHistory:
    try:
        return RunHistory.load(ctx.obj["history_file"], capacity=ctx.obj["history_size"])
    except HistoryError as e:
        raise typer.BadParameter(str(e), param_hint="--history-file")


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        family = get_plugin(name).fingerprint().get("family", "")
        typer.echo(f"{name:10s} {family}")


def _run(ctx: typer.Context, mode: str, cipher: str, key: Optional[str], text: str, no_history: bool) -> None:
    history = None if no_history else _load_history(ctx)
    run = encrypt_known if mode == "encrypt" else decrypt_known
    try:
        out = run(cipher, text, key, history=history)
    except CipherError as e:
        raise typer.BadParameter(str(e), param_hint="--key/TEXT")
    except ValueError as e:
        # unknown cipher name or missing key
        raise typer.BadParameter(str(e))

    if history is not None:
        history.save()
        logger.debug("Recorded %s run (%d entries kept)", mode, len(history))
    typer.echo(out)


@app.command()
def encrypt(
    ctx: typer.Context,
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (e.g., vigenere, hill)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    no_history: bool = typer.Option(False, "--no-history", help="Do not record this run."),
):
    """Encrypt text with a known cipher and key."""
    _run(ctx, "encrypt", cipher, key, text, no_history)


@app.command()
def decrypt(
    ctx: typer.Context,
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (e.g., vigenere, hill)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    no_history: bool = typer.Option(False, "--no-history", help="Do not record this run."),
):
    """Decrypt text with a known cipher and key."""
    _run(ctx, "decrypt", cipher, key, text, no_history)


@history_app.command("show")
def history_show(
    ctx: typer.Context,
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Show at most this many runs."),
):
    """Show the most recent runs, newest first."""
    history = _load_history(ctx)
    if not len(history):
        typer.echo("No history yet.")
        raise typer.Exit(code=0)

    for r in history.entries()[:limit]:
        when = datetime.fromtimestamp(r.timestamp).strftime("%Y-%m-%d %H:%M:%S")
        typer.echo(f"{r.id}  {when}  {r.cipher}/{r.mode}  key={r.key}")
        typer.echo(f"    in:  {r.input}")
        typer.echo(f"    out: {r.output}")


@history_app.command("clear")
def history_clear(ctx: typer.Context):
    """Delete every recorded run."""
    history = _load_history(ctx)
    history.clear()
    history.save()
    typer.echo("History cleared.")


@history_app.command("remove")
def history_remove(ctx: typer.Context, run_id: str = typer.Argument(..., help="Id shown by 'history show'.")):
    """Delete one recorded run."""
    history = _load_history(ctx)
    if not history.remove(run_id):
        raise typer.BadParameter(f"No history entry with id '{run_id}'.")
    history.save()
    typer.echo(f"Removed {run_id}.")


def main():
    app()


if __name__ == "__main__":
    main()
