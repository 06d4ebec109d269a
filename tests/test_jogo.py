import io
import random

import pytest

from corrida.jogo import (
    Corredor,
    animar_chegada,
    animar_movimento,
    mostrar_corrida,
    turno_jogador,
)
from corrida.perguntas import BaralhoPerguntas, Pergunta, PerguntasEsgotadas


def _entradas(*linhas):
    it = iter(linhas)
    return lambda: next(it)


def _baralho(n=1):
    perguntas = [Pergunta(f"P{i}?", ("Unica",), "A") for i in range(n)]
    return BaralhoPerguntas(perguntas, random.Random(0))


def test_corredor_comeca_na_partida():
    assert Corredor("Dom").posicao == 0


def test_animar_movimento_soma():
    j = Corredor("Brian", 4)
    animar_movimento(j, 3)
    assert j.posicao == 7


def test_mostrar_corrida_pista():
    texto = mostrar_corrida([Corredor("A", 0), Corredor("B", 2)], 5)
    linhas = texto.split("\n")
    assert linhas[0] == "🏁 Corrida (meta: 5 casas)"
    assert linhas[2] == "A: 🚗---🏁 (0/5)"
    assert linhas[3] == "B: --🚗-🏁 (2/5)"
    assert texto.endswith("\n\n")


def test_mostrar_corrida_na_meta_sem_carro():
    texto = mostrar_corrida([Corredor("A", 7)], 5)
    assert "🚗" not in texto
    assert "(7/5)" in texto


def test_animar_chegada_conta_casas():
    pausas = []
    out = io.StringIO()
    animar_chegada(Corredor("Dom", 28), 30, out, pausas.append)
    assert pausas == [0.5, 0.5, 0.5]
    assert "Dom está na casa 30" in out.getvalue()
    assert "cruzou a linha de chegada" in out.getvalue()


def test_turno_correto_avanca():
    j = Corredor("Dom", 2)
    baralho = _baralho()
    pausas = []
    dado = turno_jogador(j, baralho, random.Random(3), _entradas("a"), io.StringIO(), pausas.append)
    assert 1 <= dado <= 6
    assert j.posicao == 2 + dado
    assert len(baralho) == 0
    assert pausas.count(0.1) == 10


def test_turno_errado_fica():
    j = Corredor("Dom", 2)
    out = io.StringIO()
    pausas = []
    assert turno_jogador(j, _baralho(), random.Random(3), _entradas("b"), out, pausas.append) is None
    assert j.posicao == 2
    assert pausas == [1.5]
    assert "Ficas na mesma posição" in out.getvalue()


def test_turno_sem_perguntas():
    baralho = _baralho(0)
    with pytest.raises(PerguntasEsgotadas):
        turno_jogador(Corredor("Dom"), baralho, random.Random(0), _entradas("a"), io.StringIO(), lambda s: None)