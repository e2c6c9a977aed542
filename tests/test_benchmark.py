from bs4 import BeautifulSoup

from scripts.benchmark import (
    benchmark,
    complex_form,
    deep_chain,
    edge_cases,
    large_table,
    main,
    nested_structure,
    real_world_page,
)
from yahtml import convert


def test_generated_documents_convert() -> None:
    form = BeautifulSoup(convert(complex_form()), "html.parser")
    assert form.form["action"] == "/submit"
    assert len(form.select("input[required]")) == 3
    assert [o["value"] for o in form.select("select#country option")] == ["us", "uk", "ca", "au"]

    table = BeautifulSoup(convert(large_table(5, 3)), "html.parser")
    assert len(table.select("tbody tr")) == 5
    assert len(table.select("thead th")) == 3

    page = BeautifulSoup(convert(real_world_page()), "html.parser")
    assert page.select_one("div#app.container") is not None
    assert len(page.select("div.feature-card")) == 3

    assert convert(edge_cases()).endswith("<style>body { font-family: sans-serif; }</style>")


def test_nested_structure_counts() -> None:
    html = convert([nested_structure(3, 2)])

    assert html.count("<span>Leaf content</span>") == 8
    assert html.count("<div>") == 7


def test_deep_chain() -> None:
    html = convert(deep_chain(5000))

    assert html.startswith("<div>" * 5000 + "<span>")


def test_benchmark_result() -> None:
    result = benchmark("noop", lambda: None, 10)

    assert result.iterations == 10
    assert result.average_ms >= 0


def test_main_quick_run(capsys) -> None:
    assert main(["--scale", "0.001", "--stress", "--max-depth", "200", "--step", "100"]) == 0

    out = capsys.readouterr().out
    assert "Real-world page:" in out
    assert "Depth 200:" in out
