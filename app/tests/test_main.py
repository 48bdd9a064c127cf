"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

import main
from tests.factories.content import make_site_tree


@pytest.fixture
def site_env(tmp_path, monkeypatch):
    """Point the settings at a source tree under tmp_path."""
    source_dir = make_site_tree(tmp_path / "site")
    monkeypatch.setenv("SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "dist"))
    monkeypatch.setenv("TRANSITION_FADE_DURATION_MS", "0")
    return tmp_path


@pytest.mark.unit
class TestParseArgs:
    def test_build_options(self, tmp_path):
        args = main.parse_args(["build", "--output", str(tmp_path), "--serve"])
        assert args.command == "build"
        assert args.output == tmp_path
        assert args.serve is True

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            main.parse_args([])


@pytest.mark.unit
class TestMain:
    """Tests for main()."""

    def test_build(self, site_env):
        assert main.main(["build"]) == 0
        assert (site_env / "dist" / "articles" / "premier.html").is_file()

    def test_build_to_output(self, site_env):
        assert main.main(["build", "--output", str(site_env / "out")]) == 0
        assert (site_env / "out" / "index.html").is_file()

    def test_build_failure_returns_error(self, site_env):
        (site_env / "site" / "template.html").unlink()
        assert main.main(["build"]) == 1

    def test_build_with_bad_read_time_translation_returns_error(self, site_env):
        (site_env / "site" / "localization" / "fr.json").write_text(
            '{"article": {"read_time": "{minutes} min, {words} mots"}}',
            encoding="utf-8",
        )
        assert main.main(["build"]) == 1

    def test_build_with_bad_read_time_template_returns_error(self, site_env, monkeypatch):
        (site_env / "site" / "localization" / "fr.json").write_text("{}", encoding="utf-8")
        monkeypatch.setenv("READ_TIME_TEMPLATE", "{mins} min")
        assert main.main(["build"]) == 1

    def test_build_then_serve(self, site_env):
        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["build", "--serve"]) == 0

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 4173
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"

    def test_serve_missing_root(self, site_env):
        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["serve", "--root", str(site_env / "absent")]) == 1
        mock_run.assert_not_called()

    def test_verify(self, site_env):
        assert main.main(["build"]) == 0
        assert main.main(["verify"]) == 0

    def test_verify_reports_failures(self, site_env):
        main.main(["build"])
        (site_env / "dist" / "articles" / "second.html").write_text("<p>broken</p>")

        assert main.main(["verify"]) == 1
