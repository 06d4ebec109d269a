"""Entry point for the two-player terminal quiz race."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Sequence, TextIO

from corrida.jogo import Corredor, animar_chegada, mostrar_corrida, turno_jogador
from corrida.perguntas import BaralhoPerguntas, PerguntasEsgotadas
from corrida.utils import limpar_ecra

META = 30


def escolher_vencedor(jogadores: Sequence[Corredor]) -> Corredor:
    """Return the furthest racer; on a tie, the one listed first."""
    return max(jogadores, key=lambda j: j.posicao)


def correr_corrida(
    jogadores: Sequence[Corredor],
    meta: int = META,
    baralho: BaralhoPerguntas | None = None,
    rng: random.Random | None = None,
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
    pause: Callable[[float], None] | None = None,
    limpar: Callable[[], None] | None = None,
) -> Corredor:
    """Take turns until a racer reaches the finish; return the winner."""
    out = sys.stdout if out is None else out
    pause = time.sleep if pause is None else pause
    limpar = limpar_ecra if limpar is None else limpar
    rng = random.Random() if rng is None else rng
    baralho = BaralhoPerguntas(rng=rng) if baralho is None else baralho

    while True:
        for jogador in jogadores:
            limpar()
            out.write(mostrar_corrida(jogadores, meta))
            turno_jogador(jogador, baralho, rng, input_fn, out, pause)
            if jogador.posicao >= meta:
                animar_chegada(jogador, meta, out, pause)
                return escolher_vencedor(jogadores)


def _meta_positiva(valor: str) -> int:
    numero = int(valor)
    if numero < 1:
        raise argparse.ArgumentTypeError("a meta tem de ser positiva")
    return numero


def main(argv: Sequence[str] | None = None) -> int:
    """Run the race in the terminal; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="corrida", description="Corrida de perguntas no terminal."
    )
    parser.add_argument("--meta", type=_meta_positiva, default=META,
                        help="número de casas até à meta")
    args = parser.parse_args(argv)

    jogadores = [Corredor("Dom  "), Corredor("Brian")]
    print("\n🏁 VELOCIDADE FURIOSA - CORRIDA NO TERMINAL 🏁\n")
    try:
        vencedor = correr_corrida(jogadores, args.meta)
    except PerguntasEsgotadas as erro:
        print(erro, file=sys.stderr)
        return 1
    print(f"\n🏆 VENCEDOR: {vencedor.nome} 🎉🎉🎉")
    return 0


if __name__ == "__main__":
    sys.exit(main())