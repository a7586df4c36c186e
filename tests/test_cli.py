import io

from covidtop.cli import main, run
from covidtop.records import CountryRecord

RECORDS = [
    CountryRecord(country="A", cases=10, deaths=3, recovered=1, who_region="Europe"),
    CountryRecord(country="B", cases=30, deaths=1, recovered=2, who_region="Africa"),
    CountryRecord(country="C", cases=20, deaths=2, recovered=3, who_region="Americas"),
]

HEADER = "Country/Region,Confirmed,Deaths,Recovered\n"


def run_with(text):
    output = io.StringIO()
    code = run(RECORDS, io.StringIO(text), output)
    return code, output.getvalue()


def test_exit_choice_ends_program():
    code, text = run_with("4\n")
    assert code == 0
    assert text.endswith("Programa encerrado.\n")
    assert text.count("Escolha uma opcao (1-4): ") == 1


def test_invalid_option_reported():
    _, text = run_with("9\n4\n")
    assert "Opcao invalida! Tente novamente.\n" in text
    assert text.count("Escolha uma opcao (1-4): ") == 2


def test_non_numeric_option_reported():
    _, text = run_with("abc\n4\n")
    assert "Opcao invalida! Tente novamente.\n" in text


def test_invalid_quantity_reported():
    _, text = run_with("1\n0\n4\n")
    assert "Quantidade invalida! Tente novamente.\n" in text
    assert "Registro" not in text


def test_top_by_cases_ordered_and_limited():
    _, text = run_with("1\n2\n4\n")
    assert "=== Top 2 registros ===" in text
    assert "Registro 1:" in text and "Registro 2:" in text
    assert "Registro 3:" not in text
    assert text.index("Pais/Regiao: B") < text.index("Pais/Regiao: C")
    assert "Pais/Regiao: A" not in text
    assert "Casos: 30 (Selecionado)" in text


def test_top_by_recovered_on_one_line():
    _, text = run_with("3 1 4")
    assert "Pais/Regiao: C" in text
    assert "Pais/Regiao: B" not in text
    assert "Recuperados: 3 (Selecionado)" in text


def test_end_of_input_stops_loop():
    code, text = run_with("2\n")
    assert code == 0
    assert text.endswith("Programa encerrado.\n")


def test_main_missing_file_fails(tmp_path, capsys):
    code = main([str(tmp_path / "absent.csv")])
    out = capsys.readouterr().out
    assert code == 1
    assert "Falha ao carregar os dados. Encerrando o programa." in out


def test_main_header_only_fails(tmp_path, capsys):
    path = tmp_path / "data.csv"
    path.write_text(HEADER, encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Falha ao carregar os dados" in capsys.readouterr().out


def test_main_runs_menu(tmp_path, capsys, monkeypatch):
    path = tmp_path / "data.csv"
    rows = [
        "A,10,3,1,0,0,0,0,1.0,2.0,3.0,0,0,0,Europe\n",
        "B,30,1,2,0,0,0,0,1.0,2.0,3.0,0,0,0,Africa\n",
        "C,20,2,3,0,0,0,0,1.0,2.0,3.0,0,0,0,Americas\n",
    ]
    path.write_text(HEADER + "".join(rows), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n4\n"))
    code = main([str(path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Foram lidos 3 registros do arquivo." in out
    assert "Mortes: 3 (Selecionado)" in out
    assert "Regiao OMS: Europe" in out