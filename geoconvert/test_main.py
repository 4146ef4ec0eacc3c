from __future__ import annotations

import logging

import pytest

from . import __version__
from .main import main, setup_logging


def test_main_prints_dms(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['40.446195', '-79.948862', '--format', 'dms']) == 0
    assert capsys.readouterr().out.strip() == '40°26′46″N, 79°56′56″W'


def test_main_prints_all_formats(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['0', '3']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ['0°0′0″N, 3°0′0″E', '0 0N, 3 0E', '31N 500000 0']


def test_main_custom_template_and_precision(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['40.446195', '-79.948862', '-f', 'dm', '-t', '%D %N%L', '--precision', '2']) == 0
    assert capsys.readouterr().out.strip() == '40 26.77N'


@pytest.mark.parametrize(
    "argv",
    [
        ['91', '0'],
        ['90', '0', '--format', 'utm'],
        ['0', '0', '--precision', '-1'],
        ['0', '179.99', '-f', 'dm', '--precision', '30'],
    ],
)
def test_main_conversion_errors_return_one(argv, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 1
    assert capsys.readouterr().out == ''


def test_main_writes_log_file(tmp_path) -> None:
    log_file = tmp_path / 'geoconvert.log'
    assert main(['45', '3', '--format', 'utm', '--log-file', str(log_file)]) == 0
    assert 'zone 31T' in log_file.read_text(encoding='utf-8')


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(['--version'])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_setup_logging_leaves_root_handlers_alone() -> None:
    root_handlers = list(logging.getLogger().handlers)
    package_logger = setup_logging(verbose=True)
    assert package_logger.name == 'geoconvert'
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert logging.getLogger().handlers == root_handlers
