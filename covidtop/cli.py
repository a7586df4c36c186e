"""Interactive menu that ranks countries by cases, deaths or recoveries."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .heap import top
from .records import CountryRecord, SortKey, format_record, load_csv

DEFAULT_CSV = "country_wise_latest.csv"
EXIT_CHOICE = 4

MENU = (
    "\n=== Sistema de Analise de Dados COVID-19 ===\n"
    "1. Visualizar numero de casos\n"
    "2. Visualizar numero de mortes\n"
    "3. Visualizar numero de recuperados\n"
    "4. Sair\n"
    "Escolha uma opcao (1-4): "
)

_INTEGER = re.compile(r"[+-]?\d+")


class _IntReader:
    """Reads integers from whitespace-separated input, one at a time."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._tokens = (token for line in lines for token in line.split())
        self._pending = ""

    def read_int(self) -> Optional[int]:
        """Return the next integer, None for a non-integer token; EOFError at end."""
        if self._pending:
            token, self._pending = self._pending, ""
        else:
            token = next(self._tokens, None)
            if token is None:
                raise EOFError
        match = _INTEGER.match(token)
        if match is None:
            return None
        self._pending = token[match.end():]
        return int(match.group())


def run(records: Sequence[CountryRecord], input_lines: Iterable[str],
        output: TextIO) -> int:
    """Run the menu loop over the given input until exit or end of input."""
    reader = _IntReader(input_lines)
    while True:
        output.write(MENU)
        try:
            choice = reader.read_int()
        except EOFError:
            break
        if choice == EXIT_CHOICE:
            break
        if choice is None or not 1 <= choice <= 3:
            output.write("Opcao invalida! Tente novamente.\n")
            continue

        output.write("Quantos registros deseja visualizar? ")
        try:
            count = reader.read_int()
        except EOFError:
            break
        if count is None or count <= 0:
            output.write("Quantidade invalida! Tente novamente.\n")
            continue

        key = SortKey(choice)
        output.write(f"\n=== Top {count} registros ===\n")
        for position, record in enumerate(top(records, key, count), start=1):
            if record.country is not None:
                output.write(f"\nRegistro {position}:")
                output.write(format_record(record, key))

    output.write("Programa encerrado.\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the CSV file and start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="covidtop",
        description="Rank countries by COVID-19 cases, deaths or recoveries.",
    )
    parser.add_argument("csv_file", nargs="?", default=DEFAULT_CSV,
                        help="country-wise CSV file (default: %(default)s)")
    args = parser.parse_args(argv)

    out = sys.stdout
    records: list[CountryRecord] = []
    try:
        records = load_csv(args.csv_file)
    except OSError:
        out.write(f"Erro ao abrir arquivo CSV: {args.csv_file}\n")
    except ValueError:
        out.write("Arquivo aberto com sucesso\n")
        out.write("Erro ao ler cabecalho do arquivo\n")
    else:
        out.write("Arquivo aberto com sucesso\n")
        out.write(f"Foram lidos {len(records)} registros do arquivo.\n")

    if not records:
        out.write("Falha ao carregar os dados. Encerrando o programa.\n")
        return 1
    return run(records, sys.stdin, out)


if __name__ == "__main__":
    sys.exit(main())