"""Tests for the utf8wide command line interface."""

import pytest

from utf8wide.cli.utf8wide import build_parser, main, parse_value


def test_parse_value_forms():
    assert parse_value("U+20AC") == 0x20AC
    assert parse_value("u+e9") == 0xE9
    assert parse_value("0x41") == 0x41
    assert parse_value("65") == 65


def test_classify(capsys):
    main(["classify", "0xf0", "0x80"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["0xF0 4", "0x80 0 (invalid lead byte)"]


def test_encode(capsys):
    main(["encode", "U+20AC", "0x41"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["U+20AC\te2 82 ac", "U+0041\t41"]


def test_decode(capsys):
    main(["decode", "e282ac", "41"])
    assert capsys.readouterr().out.strip() == "U+20AC U+0041"


def test_to_wide_with_surrogates(capsys):
    main(["to-wide", "--width", "16", "--surrogates", "f0 9f 98 80"])
    assert capsys.readouterr().out.strip() == "0xd83d 0xde00"


def test_from_wide(capsys):
    main(["from-wide", "--width", "32", "0x20ac", "65"])
    assert capsys.readouterr().out.strip() == "e2 82 ac 41"


def test_malformed_input_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["decode", "80"])
    assert excinfo.value.code == 1
    assert "invalid leading byte" in capsys.readouterr().err


def test_strict_flag(capsys):
    main(["decode", "c181"])
    assert capsys.readouterr().out.strip() == "U+0041"
    with pytest.raises(SystemExit):
        main(["--strict", "decode", "c181"])
    assert "overlong" in capsys.readouterr().err


def test_trace_log_option(tmp_path, capsys):
    log_path = tmp_path / "trace.log"
    main(["--trace-log", str(log_path), "encode", "0x41"])
    with pytest.raises(SystemExit):
        main(["--trace-log", str(log_path), "decode", "e282"])
    content = log_path.read_text(encoding="utf-8")
    assert "encode 1 values" in content
    assert "decode failed" in content


def test_bad_hex_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["decode", "zz"])
    assert excinfo.value.code == 2
