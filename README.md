# covidtop

An interactive tool that reads a country-wise COVID-19 summary CSV and shows the
countries with the most cases, deaths or recoveries.

## Installation

    pip install .

## Usage

    covidtop [csv_file]

`csv_file` defaults to `country_wise_latest.csv` in the current directory.
On start the tool reports whether the file was opened and how many records
were read. If the file cannot be opened, has no header line, or holds no
records, it prints `Falha ao carregar os dados. Encerrando o programa.` and
exits with status 1.

Otherwise a menu is shown:

    === Sistema de Analise de Dados COVID-19 ===
    1. Visualizar numero de casos
    2. Visualizar numero de mortes
    3. Visualizar numero de recuperados
    4. Sair

Pick a ranking (1–3), then how many records to show. Each record lists the
country, its cases, deaths and recoveries (the chosen figure is marked
"(Selecionado)"), deaths and recoveries per 100 cases, and its WHO region.
An option outside 1–4, a count of zero or less, or input that is not an
integer is reported as invalid and the menu is shown again. Choose 4, or end
the input, to quit.

## CSV format

The first line is a header and is skipped. Each following line is split on
commas, and empty fields are dropped before columns are counted. The fields
used are:

| Column | Meaning                      |
|--------|------------------------------|
| 1      | Country/Region               |
| 2      | Confirmed                    |
| 3      | Deaths                       |
| 4      | Recovered                    |
| 9      | Deaths / 100 Cases           |
| 10     | Recovered / 100 Cases        |
| 11     | Deaths / 100 Recovered       |
| 15     | WHO Region                   |

Numbers are read from the leading digits of a field; a field with none, or a
missing field, counts as 0.

## Library use

    from covidtop.records import load_csv, SortKey, format_record
    from covidtop.heap import top

    records = load_csv("country_wise_latest.csv")
    for record in top(records, SortKey.DEATHS, 5):
        print(format_record(record, SortKey.DEATHS))

- `covidtop.records`: `CountryRecord` (a frozen dataclass), `SortKey`
  (`CASES`, `DEATHS`, `RECOVERED`), `parse_line`, `load_csv` (raises `OSError`
  when the file cannot be opened, `ValueError` when it has no header line) and
  `format_record`.
- `covidtop.heap`: `RecordHeap`, a max-heap of `CountryRecord` values ordered
  by a `SortKey`, with `push`, `pop` (raises `IndexError` when empty) and
  `len()`; `compare`, which returns -1, 0 or 1 for two records on a key; and
  `top`, which returns up to a given number of records, largest first.
- `covidtop.cli`: `run`, the menu loop over any lines of input and any output
  stream, and `main`, the command entry point.

## Limitations

- Quoted CSV fields are not understood: a comma inside a field shifts the
  columns that follow it.
- There is no non-interactive mode; rankings are only shown through the menu
  or the library functions above.
- Nothing is stored or written back; the CSV file is read once at start.

## Tests

    pip install .[test]
    pytest