import pytest

from chimielab.periodic import (
    COLUMNS,
    ROWS,
    ElementInfo,
    UnknownElementError,
    element_color,
    element_message,
    load_elements,
    parse_elements,
    table_cells,
)

LINES = [
    "Na | Sodiu | 11 | 22.99 | Metal alcalin\n",
    "O|Oxigen|8|16.00|Gaz\n",
    "bad|line\n",
]


def test_parse_elements_trims_and_skips_short_lines():
    data = parse_elements(LINES)
    assert set(data) == {"Na", "O"}
    assert data["Na"] == ElementInfo("Na", "Sodiu", "11", "22.99", "Metal alcalin")


def test_describe_format():
    info = ElementInfo("Na", "Sodiu", "11", "22.99", "Metal alcalin")
    assert info.describe() == (
        "Nume: Sodiu\nNumăr atomic: 11\nMasa atomică: 22.99\nDescriere: Metal alcalin"
    )


def test_later_line_overrides_earlier():
    data = parse_elements(["H|A|1|1|x", "H|B|1|1|y"])
    assert data["H"].name == "B"


def test_load_elements_round_trip(tmp_path):
    path = tmp_path / "elemente.txt"
    path.write_text("".join(LINES), encoding="utf-8")
    assert load_elements(path) == parse_elements(LINES)


def test_load_elements_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_elements(tmp_path / "elemente.txt")


@pytest.mark.parametrize(
    "symbol, color",
    [("Na", "Pink"), ("Mg", "Orange"), ("Fe", "LightGray"), ("Si", "LightGreen"),
     ("Cl", "Plum"), ("He", "LightBlue"), ("La", "Khaki"), ("U", "Gold"),
     ("H", "LightGray"), ("C", "LightGray")],
)
def test_element_color(symbol, color):
    assert element_color(symbol) == color


def test_table_shape_and_corners():
    cells = table_cells()
    assert len(cells) == ROWS
    assert all(len(row) == COLUMNS for row in cells)
    assert cells[0][0] == "H"
    assert cells[0][-1] == "He"
    assert cells[6][-1] == "Og"
    assert all(cell == "" for cell in cells[-1])


def test_table_symbols_unique():
    symbols = [cell for row in table_cells() for cell in row if cell]
    assert len(symbols) == len(set(symbols))
    assert len(symbols) == 118


def test_element_message_found():
    data = parse_elements(LINES)
    title, text = element_message(data, "O")
    assert title == "Informații despre O"
    assert text == data["O"].describe()


def test_element_message_missing():
    with pytest.raises(UnknownElementError, match="Nu există informații pentru elementul: Fe"):
        element_message(parse_elements(LINES), "Fe")