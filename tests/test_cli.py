"""
Tests for the command-line host: config, formatting helpers, main().

Run with:
    pytest tests/test_cli.py -v
"""

import io
import json
import re

import pytest

from subject_classifier import Simple, classify
from subject_classifier.cli import main as cli_main
from subject_classifier.cli.main import main
from subject_classifier.cli.utils import (
    format_json,
    format_subject,
    is_unclassified,
    matches_filters,
    read_subjects,
    truncate,
)
from subject_classifier.config import Config, ConfigManager

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def _strip(text: str) -> str:
    return ANSI_RE.sub('', text)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Isolate main() from any .scrc on the machine running the tests."""
    monkeypatch.setattr(cli_main, "load_config", lambda: Config())
    monkeypatch.delenv("SC_FORMAT", raising=False)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:
    """Config defaults, from_dict() and validate()."""

    def test_defaults(self):
        config = Config()
        assert config.format == "text"
        assert config.show_icon is True
        assert config.show_scope is True
        assert config.strict is False
        assert config.max_description_length == 0

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"format": "json", "provider": "claude"})
        assert config.format == "json"
        assert not hasattr(config, "provider")

    def test_validate_invalid_format(self):
        config = Config(format="yaml")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.format == "text"

    def test_validate_invalid_bool(self):
        config = Config(show_icon="yes")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.show_icon is True

    @pytest.mark.parametrize("length", [-1, "80", 2.5, True])
    def test_validate_invalid_max_description_length(self, length):
        config = Config(max_description_length=length)
        assert len(config.validate()) == 1
        assert config.max_description_length == 0

    def test_validate_valid_config_no_warnings(self):
        assert Config(format="json", strict=True, max_description_length=72).validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"format": "xml"})
        assert "Config warning" in capsys.readouterr().err


class TestConfigManager:
    """ConfigManager.load() lookup order and fallbacks."""

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        manager = ConfigManager()
        assert manager.load() == Config()
        assert manager.get_config_path() is None

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / ".scrc"
        config_file.write_text(json.dumps({"format": "json", "show_icon": False}))

        manager = ConfigManager()
        config = manager.load()
        assert config.format == "json"
        assert config.show_icon is False
        assert manager.get_config_path() == config_file

    def test_falls_back_to_home_file(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        (home / ".scrc").write_text(json.dumps({"strict": True, "max_description_length": 50}))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: home)

        manager = ConfigManager()
        loaded = manager.load()
        assert manager.get_config_path() == home / ".scrc"
        assert loaded.strict is True
        assert loaded.max_description_length == 50

    def test_malformed_json_returns_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".scrc").write_text("not valid json {{{")

        config = ConfigManager().load()
        assert config == Config()
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".scrc").write_text("[1, 2]")
        assert ConfigManager().load() == Config()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

class TestUtils:
    """CLI helpers: stdin reading, truncation, filters, rendering."""

    def test_read_subjects_skips_blank_lines(self):
        stream = io.StringIO("feat: a\n\n  \nfix: b\r\n")
        assert list(read_subjects(stream)) == ["feat: a", "fix: b"]

    @pytest.mark.parametrize("text, length, expected", [
        ("hello world", 0, "hello world"),
        ("hello world", 20, "hello world"),
        ("hello world", 5, "hell…"),
        ("hello", 1, "…"),
    ])
    def test_truncate(self, text, length, expected):
        assert truncate(text, length) == expected

    @pytest.mark.parametrize("text, expected", [
        ("hello", True),
        ("Makefile: fix target", True),
        ("feat: add x", False),
        ("Merge #12", False),
        ("Release 1.0", False),
    ])
    def test_is_unclassified(self, text, expected):
        assert is_unclassified(classify(text)) is expected

    def test_matches_filters(self):
        feat = classify("feat: add x")
        assert matches_filters(feat)
        assert matches_filters(feat, category="feat")
        assert not matches_filters(feat, category="fix")
        assert matches_filters(feat, kind="conventional_commit")
        assert not matches_filters(classify("Merge #1"), category="feat")
        assert not matches_filters(classify("hello"), kind="release")

    def test_format_subject_full(self):
        line = _strip(format_subject(classify("build(repo): Always use local file-expert")))
        assert line == "\U0001f528(repo) Always use local file-expert"

    def test_format_subject_without_icon_and_scope(self):
        subject = classify("build(repo): Always use local file-expert")
        line = _strip(format_subject(subject, show_icon=False, show_scope=False))
        assert line == "Always use local file-expert"

    def test_format_subject_truncates(self):
        line = _strip(format_subject(Simple("a long subject"), show_icon=False, max_length=6))
        assert line == "a lon…"

    def test_format_json(self):
        data = json.loads(format_json(classify("fix(search)!: This breaks the api")))
        assert data["kind"] == "conventional_commit"
        assert data["category"] == "fix"
        assert data["breaking_change"] is True
        assert data["scope"] == "search"
        assert data["description"] == "! This breaks the api"


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    """main() end-to-end with argv and stdin."""

    def test_classifies_arguments(self, capsys):
        assert main(["--no-icon", "feat(ui): dark mode", "Release v1.2.0"]) == 0
        lines = _strip(capsys.readouterr().out).splitlines()
        assert lines == ["(ui) dark mode", "Release v1.2.0"]

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("docs: readme\nMerge #7\n"))
        assert main(["--no-icon"]) == 0
        assert _strip(capsys.readouterr().out).splitlines() == ["readme", "Merge #7"]

    def test_json_output(self, capsys):
        assert main(["--json", "Update :lib to abc123"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "subtree_commit"
        assert data["operation"] == "update"
        assert data["scope"] == "lib"
        assert data["git_ref"] == "abc123"

    def test_env_format(self, capsys, monkeypatch):
        monkeypatch.setenv("SC_FORMAT", "json")
        assert main(["hello"]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "simple"

    def test_invalid_env_format_warns(self, capsys, monkeypatch):
        monkeypatch.setenv("SC_FORMAT", "xml")
        assert main(["--no-icon", "hello"]) == 0
        captured = capsys.readouterr()
        assert "SC_FORMAT" in captured.err
        assert _strip(captured.out).strip() == "hello"

    def test_strict_fails_on_unclassified(self, capsys):
        assert main(["--strict", "feat: ok", "just some words"]) == 1
        err = _strip(capsys.readouterr().err)
        assert "Unclassified subject: just some words" in err
        assert "1 unclassified subject" in err

    def test_strict_passes(self):
        assert main(["--strict", "feat: ok", "fix: also ok"]) == 0

    def test_type_filter(self, capsys):
        assert main(["--no-icon", "-t", "fix", "feat: a", "fix: b"]) == 0
        assert _strip(capsys.readouterr().out).splitlines() == ["fix: b"]

    def test_only_filter(self, capsys):
        assert main(["--no-icon", "--only", "pull_request", "feat: a", "Merge #9"]) == 0
        assert _strip(capsys.readouterr().out).splitlines() == ["Merge #9"]

    def test_verbose_reports_kind(self, capsys):
        assert main(["--verbose", "revert x"]) == 0
        assert "revert" in capsys.readouterr().err

    def test_no_input_on_tty(self, capsys, monkeypatch):
        class _Tty(io.StringIO):
            def isatty(self):
                return True
        monkeypatch.setattr("sys.stdin", _Tty())
        assert main([]) == 2
        assert "No subjects given" in capsys.readouterr().err

    def test_display_config(self, capsys):
        assert main(["--display-config"]) == 0
        assert "Current Configuration" in _strip(capsys.readouterr().out)

    def test_install_completion(self, capsys, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/bash")
        assert main(["--install-completion"]) == 0
        assert "register-python-argcomplete subject-classifier" in capsys.readouterr().out

    def test_config_not_mutated_by_flags(self, monkeypatch, capsys):
        shared = Config()
        monkeypatch.setattr(cli_main, "load_config", lambda: shared)
        main(["--json", "--strict", "feat: a"])
        assert shared == Config()
