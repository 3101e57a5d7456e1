import io
import logging

import pytest

from cpulink.logger import (
    COLOR_RED,
    RESET_COLOR,
    close_logger,
    log_custom_error,
    start_logger,
)


def test_custom_error_format():
    stream = io.StringIO()
    log_custom_error("boom", stream)
    assert stream.getvalue() == f"{COLOR_RED} ✖️ [CUSTOM ERROR]:{RESET_COLOR} boom\n"


def test_custom_error_defaults_to_stderr(capsys):
    log_custom_error("falla")
    captured = capsys.readouterr()
    assert "[CUSTOM ERROR]" in captured.err
    assert captured.err.endswith("falla\n")
    assert captured.out == ""


def test_logger_writes_file_and_console(tmp_path, capsys):
    path = tmp_path / "cpu.log"
    logger = start_logger(path, "CPU")
    try:
        assert logger.level == logging.INFO
        logger.info("instanciado")
        logger.debug("oculto")
    finally:
        close_logger(logger)
    content = path.read_text(encoding="utf-8")
    assert "instanciado" in content
    assert "CPU" in content
    assert "[INFO]" in content
    assert "oculto" not in content
    assert "instanciado" in capsys.readouterr().out


def test_logger_appends(tmp_path):
    path = tmp_path / "cpu.log"
    for text in ("primero", "segundo"):
        logger = start_logger(path, "CPU")
        logger.warning(text)
        close_logger(logger)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("primero")
    assert lines[1].endswith("segundo")


def test_close_removes_handlers(tmp_path):
    logger = start_logger(tmp_path / "x.log", "X")
    assert len(logger.handlers) == 2
    close_logger(logger)
    assert logger.handlers == []


def test_start_logger_bad_path_raises(tmp_path, capsys):
    with pytest.raises(OSError):
        start_logger(tmp_path / "missing" / "cpu.log", "CPU")
    assert "No se pudo instanciar" in capsys.readouterr().err