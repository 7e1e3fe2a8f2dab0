"""
Console channel — the installer's single interactive terminal handle.

Owns the input/output streams for one run: the four tagged message
categories the user sees, and line prompts. The CLI acquires it with
``with ConsoleChannel() as console:`` so it is released on every exit
path, including hard exits.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

logger = logging.getLogger(__name__)

# category → (tag, colour)
_TAGS: dict[str, tuple[str, str]] = {
    "step": ("[STEP]", "cyan"),
    "success": ("[SUCCESS]", "green"),
    "error": ("[ERROR]", "red"),
    "warning": ("[WARNING]", "yellow"),
}


class ConsoleChannel:
    """Tagged output plus blocking line input.

    Args:
        input_stream: Where answers are read from (default: stdin).
        output_stream: Where messages go (default: stdout).
        color: Force ANSI colour on/off; None lets click decide.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        color: bool | None = None,
    ):
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self._color = color
        self._closed = False

    def __enter__(self) -> ConsoleChannel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the channel. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            self._out.flush()
        except (OSError, ValueError):
            logger.debug("Output stream already closed")

    # ── Output ──────────────────────────────────────────────────

    def echo(self, message: str = "", **style: object) -> None:
        """Plain line, optionally styled (fg=..., bold=...)."""
        if style:
            click.secho(message, file=self._out, color=self._color, **style)
        else:
            click.echo(message, file=self._out, color=self._color)

    def _tagged(self, category: str, message: str) -> None:
        tag, fg = _TAGS[category]
        click.secho(tag, fg=fg, nl=False, file=self._out, color=self._color)
        click.echo(f" {message}", file=self._out, color=self._color)

    def step(self, message: str) -> None:
        self._tagged("step", message)

    def success(self, message: str) -> None:
        self._tagged("success", message)

    def error(self, message: str) -> None:
        self._tagged("error", message)

    def warning(self, message: str) -> None:
        self._tagged("warning", message)

    # ── Input ───────────────────────────────────────────────────

    def question(self, prompt: str) -> str:
        """Show ``prompt`` and block until one line is entered.

        Returns the line without its terminator; end-of-input gives "".
        """
        if self._closed:
            raise RuntimeError("Console channel is closed")

        click.echo(prompt, nl=False, file=self._out, color=self._color)
        self._out.flush()
        line = self._in.readline()
        if not line:
            logger.debug("End of input while waiting for an answer")
            return ""
        return line.rstrip("\r\n")
