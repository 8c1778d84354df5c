"""
Tests for the reformatter command and its settings.
"""

import io

import pytest
import yaml

from diplomacy_report import reformat
from diplomacy_report.config import Settings, ENV_INPUT, ENV_LOG_LEVEL, ENV_LENIENT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ENV_INPUT, ENV_LOG_LEVEL, ENV_LENIENT):
        monkeypatch.delenv(name, raising=False)


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.input_path == "data.txt"
        assert settings.log_level == "INFO"
        assert settings.lenient is False

    def test_from_env(self):
        settings = Settings.from_env({
            ENV_INPUT: "games/42.txt",
            ENV_LOG_LEVEL: "debug",
            ENV_LENIENT: "Yes",
        })
        assert settings.input_path == "games/42.txt"
        assert settings.log_level_value == 10
        assert settings.lenient is True

    def test_bad_log_level(self):
        with pytest.raises(ValueError):
            Settings(log_level="chatty").log_level_value


def test_reformat_to_stdout(report_file, sample_rendered, capsys):
    assert reformat.main([str(report_file)]) == reformat.EXIT_OK
    assert capsys.readouterr().out == sample_rendered


def test_reformat_to_files(report_file, sample_rendered, tmp_path):
    output = tmp_path / "out.txt"
    yaml_path = tmp_path / "out.yaml"
    code = reformat.main([str(report_file), "-o", str(output), "--yaml", str(yaml_path)])
    assert code == reformat.EXIT_OK
    assert output.read_text(encoding="utf-8") == sample_rendered
    assert len(yaml.safe_load(yaml_path.read_text())['rounds']) == 2


def test_reads_stdin(sample_report, sample_rendered, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(sample_report))
    assert reformat.main(["-"]) == reformat.EXIT_OK
    assert capsys.readouterr().out == sample_rendered


def test_input_from_environment(report_file, sample_rendered, monkeypatch, capsys):
    monkeypatch.setenv(ENV_INPUT, str(report_file))
    assert reformat.main([]) == reformat.EXIT_OK
    assert capsys.readouterr().out == sample_rendered


def test_missing_file(tmp_path):
    assert reformat.main([str(tmp_path / "nope.txt")]) == reformat.EXIT_INPUT_ERROR


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n")
    assert reformat.main([str(path)]) == reformat.EXIT_INPUT_ERROR


def test_unparseable_report(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("Game log\n")
    assert reformat.main([str(path)]) == reformat.EXIT_PARSE_ERROR
    assert capsys.readouterr().out == ""


def test_trailing_content(report_file, sample_rendered, capsys):
    report_file.write_text(report_file.read_text() + "\nEnd of report\n")
    assert reformat.main([str(report_file)]) == reformat.EXIT_PARSE_ERROR

    assert reformat.main([str(report_file), "--lenient"]) == reformat.EXIT_OK
    assert capsys.readouterr().out == sample_rendered


def test_bad_log_level_option(report_file):
    assert reformat.main([str(report_file), "--log-level", "chatty"]) == reformat.EXIT_INPUT_ERROR


def test_output_to_missing_directory(report_file, tmp_path, capsys):
    output = tmp_path / "missing_dir" / "out.txt"
    assert reformat.main([str(report_file), "-o", str(output)]) == reformat.EXIT_OUTPUT_ERROR
    assert not output.exists()


def test_yaml_to_missing_directory(report_file, tmp_path, capsys):
    yaml_path = tmp_path / "missing_dir" / "out.yaml"
    code = reformat.main([str(report_file), "--yaml", str(yaml_path)])
    assert code == reformat.EXIT_OUTPUT_ERROR


def test_strict_overrides_lenient_environment(report_file, sample_rendered, monkeypatch, capsys):
    report_file.write_text(report_file.read_text() + "\nEnd of report\n")
    monkeypatch.setenv(ENV_LENIENT, "1")

    assert reformat.main([str(report_file)]) == reformat.EXIT_OK
    assert capsys.readouterr().out == sample_rendered

    assert reformat.main([str(report_file), "--strict"]) == reformat.EXIT_PARSE_ERROR
    assert capsys.readouterr().out == ""


def test_lenient_and_strict_are_exclusive(report_file):
    with pytest.raises(SystemExit):
        reformat.main([str(report_file), "--lenient", "--strict"])
