"""Terminal helpers: reading an A-D answer and clearing the screen."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, TextIO

_VALIDAS = "ABCD"


def _ler_caractere(input_fn: Callable[[], str]) -> str:
    """Read lines until one holds a non-blank character; return it upper-cased."""
    while True:
        linha = input_fn().strip()
        if linha:
            return linha[0].upper()


def ler_resposta(
    input_fn: Callable[[], str] = input, out: TextIO | None = None
) -> str:
    """Ask for an option letter until one of A, B, C or D is given."""
    out = sys.stdout if out is None else out
    out.write("Escolhe a opção (A/B/C/D): ")
    out.flush()
    resposta = _ler_caractere(input_fn)
    while resposta not in _VALIDAS:
        out.write("Resposta inválida. Tenta novamente (A/B/C/D): ")
        out.flush()
        resposta = _ler_caractere(input_fn)
    return resposta


def limpar_ecra() -> None:
    """Clear the terminal using the platform's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass