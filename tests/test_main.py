import io
import random
from unittest import mock

import pytest

from corrida.jogo import Corredor
from corrida.main import correr_corrida, escolher_vencedor, main
from corrida.perguntas import BaralhoPerguntas, Pergunta, PerguntasEsgotadas


def _baralho(n):
    perguntas = [Pergunta(f"P{i}?", ("Unica",), "A") for i in range(n)]
    return BaralhoPerguntas(perguntas, random.Random(0))


def test_escolher_vencedor_maior_posicao():
    jogadores = [Corredor("Dom", 3), Corredor("Brian", 9), Corredor("Tej", 5)]
    assert escolher_vencedor(jogadores).nome == "Brian"


def test_escolher_vencedor_empate_primeiro():
    jogadores = [Corredor("Dom", 4), Corredor("Brian", 4)]
    assert escolher_vencedor(jogadores) is jogadores[0]


def test_correr_corrida_primeiro_acerta_ganha():
    jogadores = [Corredor("Dom"), Corredor("Brian")]
    limpezas = []
    vencedor = correr_corrida(
        jogadores, 1, _baralho(5), random.Random(2), lambda: "A",
        io.StringIO(), lambda s: None, lambda: limpezas.append(1),
    )
    assert vencedor is jogadores[0]
    assert jogadores[1].posicao == 0
    assert limpezas == [1]


def test_correr_corrida_alterna_jogadores():
    jogadores = [Corredor("Dom"), Corredor("Brian")]
    respostas = iter(["B", "A"])
    vencedor = correr_corrida(
        jogadores, 1, _baralho(5), random.Random(2), lambda: next(respostas),
        io.StringIO(), lambda s: None, lambda: None,
    )
    assert vencedor is jogadores[1]
    assert jogadores[0].posicao == 0


def test_correr_corrida_esgota_perguntas():
    jogadores = [Corredor("Dom"), Corredor("Brian")]
    with pytest.raises(PerguntasEsgotadas):
        correr_corrida(
            jogadores, 10, _baralho(3), random.Random(0), lambda: "B",
            io.StringIO(), lambda s: None, lambda: None,
        )


def test_main_meta_invalida():
    with pytest.raises(SystemExit):
        main(["--meta", "0"])