# corrida

A two-player trivia race for the terminal. Dom and Brian take turns answering
multiple-choice questions about cars and the *Velocidade Furiosa* film saga.
A correct answer rolls a six-sided die and moves the player's car forward by
that many squares; a wrong answer leaves it where it is. The first player to
reach the finish (square 30 by default) ends the race, and the player furthest
ahead is announced as the winner.

## Installation

```
pip install .
```

## Playing

```
corrida
```

To change how many squares the track has:

```
corrida --meta 20
```

`--meta` must be a positive whole number.

Each turn the screen is cleared (with `clear`, or `cls` on Windows), the track
is drawn, and a question is shown with options `A` to `D`. Type a letter and
press Enter; only the first non-blank character of the line counts, and case
does not matter. Any letter outside the options counts as a wrong answer.

Questions are shuffled once at the start of the game and never repeat; the
order of the options is shuffled again every time a question is asked. If every
question is used before anyone finishes, the game prints
`Todas as perguntas foram utilizadas!` to standard error and exits with
status 1.

## Using it as a library

Input, output, pauses, screen clearing and randomness can all be passed in, so
the game can be driven from your own code or tests.

`corrida.perguntas`

- `Pergunta(texto, opcoes, correta)` is a frozen question; `correta` is the
  letter of the right option and is checked on creation (`ValueError` if it
  does not name an option). `resposta_correta` gives the right option's text,
  and `baralhada(rng)` returns a copy with the options shuffled and the letter
  updated.
- `perguntas_padrao()` returns the built-in question list in its fixed order.
- `BaralhoPerguntas(perguntas=None, rng=None)` shuffles the questions (the
  built-in set when none are given) and hands them out with `proxima()`, each
  with its options shuffled. `len()` gives how many are left; `proxima()`
  raises `PerguntasEsgotadas` once every question has been used.
- `fazer_pergunta(pergunta, input_fn=input, out=None)` prints the question,
  reads one answer and returns whether it was right.

`corrida.jogo`

- `Corredor(nome, posicao=0)` holds a player's name and square.
- `mostrar_corrida(jogadores, meta)` returns the track as a string.
- `animar_movimento(jogador, dado)` moves a player forward.
- `animar_chegada(jogador, meta, out=None, pause=None)` prints the arrival
  animation.
- `turno_jogador(jogador, baralho, rng=None, input_fn=input, out=None, pause=None)`
  plays one turn and returns the die roll, or `None` after a wrong answer.

`corrida.main`

- `correr_corrida(jogadores, meta=30, baralho=None, rng=None, input_fn=input, out=None, pause=None, limpar=None)`
  plays turns until a player reaches `meta` and returns the winner.
- `escolher_vencedor(jogadores)` returns the player furthest ahead, the first
  listed on a tie.
- `main(argv=None)` is the `corrida` command.

`corrida.utils`

- `ler_resposta(input_fn=input, out=None)` keeps asking until one of `A`–`D`
  is given and returns it.
- `limpar_ecra()` clears the terminal.

## What it does not do

The players are always Dom and Brian; their names and number cannot be set
from the command line. Scores and results are not saved between games.

## Running the tests

```
pip install ".[test]"
pytest
```