import io
import os
from unittest import mock

from corrida.utils import ler_resposta, limpar_ecra


def _entradas(*linhas):
    it = iter(linhas)
    return lambda: next(it)


def test_ler_resposta_aceita_minuscula():
    out = io.StringIO()
    assert ler_resposta(_entradas("c"), out) == "C"
    assert "Escolhe a opção (A/B/C/D): " in out.getvalue()


def test_ler_resposta_repete_ate_valida():
    out = io.StringIO()
    assert ler_resposta(_entradas("x", "", "  b  "), out) == "B"
    assert out.getvalue().count("Resposta inválida. Tenta novamente (A/B/C/D): ") == 1


def test_ler_resposta_usa_primeiro_caractere():
    out = io.StringIO()
    assert ler_resposta(_entradas("e", "dz"), out) == "D"


def test_limpar_ecra_posix():
    with mock.patch.object(os, "name", "posix"), mock.patch(
        "corrida.utils.subprocess.run"
    ) as run:
        resultado = limpar_ecra()
    assert resultado is None
    assert run.call_count == 1
    assert run.call_args == mock.call(["clear"], check=False)


def test_limpar_ecra_windows():
    with mock.patch.object(os, "name", "nt"), mock.patch(
        "corrida.utils.subprocess.run"
    ) as run:
        resultado = limpar_ecra()
    assert resultado is None
    assert run.call_count == 1
    assert run.call_args == mock.call("cls", shell=True, check=False)


def test_limpar_ecra_ignora_comando_ausente():
    with mock.patch("corrida.utils.subprocess.run", side_effect=FileNotFoundError):
        assert limpar_ecra() is None