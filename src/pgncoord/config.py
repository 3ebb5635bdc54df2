"""Interpreter configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InterpreterOptions:
    """Behaviour switches for :class:`~pgncoord.game.interpreter.MoveInterpreter`.

    Attributes:
        verify_castling: Ask the oracle whether a castle is legal before
            playing it. Off by default: castle tokens pass straight through
            to the oracle.
    """

    verify_castling: bool = False
