import pytest
from bitarray import bitarray

from huffcode.cli import compression_log, format_codes, main


def test_demo_input_round_trip(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Round trip: OK"


def test_text_argument_shows_decoded(capsys):
    assert main(["--text", "hello world", "--show-decoded"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["hello world", "Round trip: OK"]


def test_file_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("Zażółć gęślą jaźń\nline two\n", encoding="utf-8")
    assert main([str(path), "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "Round trip: OK" in out
    assert "Encoded size:" in out
    assert "Decoded in" in out


def test_show_codes(capsys):
    assert main(["--text", "BCAADDDCCACACAC", "--show-codes"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == ["'C'\t1", "'A'\t00", "'D'\t010", "'B'\t011"]


def test_single_symbol_text(capsys):
    assert main(["--text", "AAAA", "--show-codes"]) == 0
    assert capsys.readouterr().out.splitlines() == ["'A'\t1", "Round trip: OK"]


def test_empty_file_is_an_error(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_missing_file_is_an_error(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_file_and_text_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "a.txt"), "--text", "abc"])
    assert exc_info.value.code == 2


def test_compression_log_reduced():
    log = compression_log("BCAADDDCCACACAC", 28)
    assert log.splitlines() == [
        "Original size: 120 bits",
        "Encoded size: 28 bits",
        "Size reduced by 92 bits (76.7% total saving)",
    ]


def test_compression_log_increased():
    assert compression_log("A", 9).endswith("Size increased by 1 bits")


def test_format_codes_orders_by_length_then_bits():
    codes = {"x": bitarray("10"), "y": bitarray("0"), "z": bitarray("11")}
    assert format_codes(codes) == "'y'\t0\n'x'\t10\n'z'\t11"
