import json
import logging
import struct

from etfterm.cli import main

def test_to_json_stdout(tmp_path, capsys, stocks_bytes, stocks):
    src = tmp_path / "msg.bin"
    src.write_bytes(stocks_bytes)
    assert main(["to-json", str(src)]) == 0
    assert json.loads(capsys.readouterr().out) == stocks

def test_to_json_base64_to_file(tmp_path, stocks_b64, stocks):
    src = tmp_path / "msg.b64"
    src.write_text(stocks_b64 + "\n", encoding="ascii")
    out = tmp_path / "msg.json"
    assert main(["to-json", "--base64", "--compact", str(src), str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "\n  " not in text
    assert json.loads(text) == stocks

def test_info(tmp_path, capsys, stocks_bytes):
    src = tmp_path / "msg.bin"
    src.write_bytes(stocks_bytes)
    assert main(["info", str(src)]) == 0
    assert capsys.readouterr().out.strip() == "kind=mapping size=2 consumed=282/282"

def test_nil_flag(tmp_path, capsys):
    src = tmp_path / "nil.bin"
    src.write_bytes(bytes([131, 106]))
    assert main(["--nil-as-sequence", "info", str(src)]) == 0
    assert capsys.readouterr().out.startswith("kind=sequence size=0")

def test_format_error_exit_code(tmp_path, caplog, stocks_bytes):
    src = tmp_path / "cut.bin"
    src.write_bytes(stocks_bytes[:-1])
    with caplog.at_level(logging.ERROR):
        assert main(["to-json", str(src)]) == 2
    assert "truncated-input" in caplog.text
    assert any(r.name == "etfterm.cli" and r.levelno == logging.ERROR for r in caplog.records)

def test_missing_file_exit_code(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["info", str(tmp_path / "nope.bin")]) == 1

def test_signed_int32_flag(tmp_path, capsys):
    src = tmp_path / "int.bin"
    src.write_bytes(bytes([131, 98, 255, 255, 255, 254]))
    assert main(["to-json", str(src)]) == 0
    assert capsys.readouterr().out.strip() == "4294967294"
    assert main(["--signed-int32", "to-json", str(src)]) == 0
    assert capsys.readouterr().out.strip() == "-2"

def test_non_finite_float_exit_code(tmp_path, caplog):
    src = tmp_path / "nan.bin"
    src.write_bytes(bytes([131, 70]) + struct.pack(">d", float("inf")))
    with caplog.at_level(logging.ERROR):
        assert main(["to-json", str(src)]) == 2
    assert "non-finite-float" in caplog.text
