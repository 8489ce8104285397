import io
import sys

import pytest

from aulalab.inventario import (
    INPUT_ERROR,
    fill_inventory,
    format_list,
    interleave,
    main,
    read_int,
    subtract,
)


def _reader(lines):
    items = iter(lines)

    def read():
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


def _writer():
    out = []
    return out, out.append


def test_interleave_equal_lengths_alternates():
    a = [1, 2, 3]
    b = [10, 20, 30]
    result = interleave(a, b)
    assert result[::2] == a
    assert result[1::2] == b


def test_interleave_longer_first_keeps_tail():
    a = [4, 5, 6, 7]
    b = [8]
    result = interleave(a, b)
    assert len(result) == len(a) + len(b)
    assert result[:2] == [4, 8]
    assert result[2:] == [5, 6, 7]


def test_interleave_longer_second_keeps_tail():
    a = [1]
    b = [2, 3, 4]
    assert interleave(a, b) == [1, 2, 3, 4]


def test_interleave_with_empty():
    assert interleave([], [3, 4]) == [3, 4]
    assert interleave([3, 4], []) == [3, 4]
    assert interleave([], []) == []


def test_interleave_keeps_zero_and_negative_values():
    result = interleave([0, -1], [0])
    assert sorted(result) == sorted([0, -1, 0])
    assert len(result) == 3


def test_subtract_against_empty_is_identity():
    assert subtract([5, 9, -2], []) == [5, 9, -2]


def test_subtract_from_empty_negates():
    assert subtract([], [5, 9]) == [-5, -9]


def test_subtract_round_trip():
    a = [10, 7, 3, 8]
    b = [4, 9]
    difference = subtract(a, b)
    assert len(difference) == max(len(a), len(b))
    padded_b = b + [0] * (len(a) - len(b))
    assert [d + y for d, y in zip(difference, padded_b)] == a


def test_subtract_self_is_zero():
    values = [3, 1, 4, 1, 5]
    assert subtract(values, values) == [0] * len(values)


def test_format_list():
    assert format_list("Intercalado: ", [1, 2]) == "Intercalado: 1 2 \n"
    assert format_list("Diferencia: ", []) == "Diferencia: \n"


def test_read_int_retries_on_bad_input():
    out, write = _writer()
    value = read_int(_reader(["abc\n", "\n", "42\n"]), write, "N: ")
    assert value == 42
    assert out.count(INPUT_ERROR) == 1
    assert out.count("N: ") == 2


def test_read_int_rejects_out_of_range():
    out, write = _writer()
    value = read_int(_reader(["99999999999\n", "-7\n"]), write, "N: ")
    assert value == -7
    assert INPUT_ERROR in out


def test_read_int_eof_raises():
    _, write = _writer()
    with pytest.raises(EOFError):
        read_int(_reader(["x\n"]), write, "N: ")


def test_fill_inventory_prompts_each_product():
    out, write = _writer()
    values = fill_inventory(_reader(["5\n", "7\n"]), write, 2)
    assert values == [5, 7]
    assert out == ["Cantidad producto [1]: ", "Cantidad producto [2]: "]


def test_fill_inventory_non_positive_count_is_empty():
    out, write = _writer()
    assert fill_inventory(_reader([]), write, 0) == []
    assert fill_inventory(_reader([]), write, -3) == []
    assert out == []


def test_main_full_run(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n5\n7\n1\n3\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Sucursal A: 5 7 \n" in output
    assert "Sucursal B: 3 \n" in output
    assert "Intercalado: 5 3 7 \n" in output
    assert "Diferencia: 2 7 \n" in output
    assert output.endswith("\nPrograma finalizado correctamente.\n")


def test_main_returns_one_on_eof(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([]) == 1