"""Runners, the race board and a single player's turn."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from corrida.perguntas import BaralhoPerguntas, fazer_pergunta


@dataclass
class Corredor:
    """A racer and the square it is on."""

    nome: str
    posicao: int = 0


def animar_movimento(jogador: Corredor, dado: int) -> None:
    """Move the racer forward by the dice roll."""
    jogador.posicao += dado


def animar_chegada(
    jogador: Corredor,
    meta: int,
    out: TextIO | None = None,
    pause: Callable[[float], None] | None = None,
) -> None:
    """Animate the racer reaching the finish line."""
    out = sys.stdout if out is None else out
    pause = time.sleep if pause is None else pause
    out.write(f"\n🎉 {jogador.nome} está chegando à meta!\n")
    for casa in range(jogador.posicao, meta + 1):
        out.write(f"\r{jogador.nome} está na casa {casa} ")
        out.flush()
        pause(0.5)
    out.write(f"\n🏁 {jogador.nome} cruzou a linha de chegada! 🎉\n")


def mostrar_corrida(jogadores: Sequence[Corredor], meta: int) -> str:
    """Render the race track for every racer."""
    linhas = [f"🏁 Corrida (meta: {meta} casas)\n\n"]
    for j in jogadores:
        pista = "".join(
            "🚗" if i == j.posicao else "🏁" if i == meta - 1 else "-"
            for i in range(meta)
        )
        linhas.append(f"{j.nome}: {pista} ({j.posicao}/{meta})\n")
    linhas.append("\n")
    return "".join(linhas)


def turno_jogador(
    jogador: Corredor,
    baralho: BaralhoPerguntas,
    rng: random.Random | None = None,
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
    pause: Callable[[float], None] | None = None,
) -> int | None:
    """Play one turn; return the dice roll, or None when the answer was wrong."""
    out = sys.stdout if out is None else out
    pause = time.sleep if pause is None else pause
    rng = random.Random() if rng is None else rng

    out.write(f"\n🎮 Turno de {jogador.nome}\n")
    pergunta = baralho.proxima()
    if not fazer_pergunta(pergunta, input_fn, out):
        out.write("❌ Errado! Ficas na mesma posição.\n")
        pause(1.5)
        return None

    out.write("🎯 Correto! A lançar o dado...\n")
    for _ in range(10):
        out.write(f"\r🎲 A girar... {rng.randint(1, 6)}   ")
        out.flush()
        pause(0.1)
    dado = rng.randint(1, 6)
    out.write(f"\r🎲 Saiu: {dado}! Avanças {dado} casas.\n")
    pause(0.5)
    animar_movimento(jogador, dado)
    return dado