"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from facesmith import __version__
from facesmith.cli.app import app, load_context
from facesmith.config import FacesmithSettings, LibraryConfig
from facesmith.exceptions import FontLibraryError, TemplateLoadError, WhitelistError

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_configuration():
    """Keep CLI runs from reconfiguring global logging."""
    with patch("facesmith.cli.app.configure_logging") as configure:
        yield configure


class TestLoadContext:
    """Tests for load_context."""

    def test_loads_resources(self, library_dir, whitelist_file):
        settings = FacesmithSettings(
            library=LibraryConfig(fonts_dir=library_dir, whitelist_path=whitelist_file)
        )
        context = load_context(settings)
        assert len(context.index) == 18
        assert len(context.whitelist) == 1
        assert context.server == settings.server

    def test_empty_library(self, tmp_path, whitelist_file):
        empty = tmp_path / "empty"
        empty.mkdir()
        settings = FacesmithSettings(
            library=LibraryConfig(fonts_dir=empty, whitelist_path=whitelist_file)
        )
        with pytest.raises(FontLibraryError, match="empty font library"):
            load_context(settings)

    def test_empty_whitelist(self, tmp_path, library_dir):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"domains": []}), encoding="utf-8")
        settings = FacesmithSettings(library=LibraryConfig(fonts_dir=library_dir, whitelist_path=path))
        with pytest.raises(WhitelistError, match="empty whitelist"):
            load_context(settings)

    def test_broken_templates(self, tmp_path, library_dir, whitelist_file):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "woff.css.j2").write_text("{% if %}", encoding="utf-8")
        settings = FacesmithSettings(
            library=LibraryConfig(
                fonts_dir=library_dir,
                whitelist_path=whitelist_file,
                templates_dir=templates,
            )
        )
        with pytest.raises(TemplateLoadError):
            load_context(settings)


class TestServeCommand:
    """Tests for the serve command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    @patch("facesmith.cli.app.uvicorn.run")
    def test_serve(self, mock_run, library_dir, whitelist_file):
        """Test that a valid configuration starts the server."""
        result = runner.invoke(
            app,
            [
                "--bind", "127.0.0.1:8080",
                "--library", str(library_dir),
                "--whitelist", str(whitelist_file),
                "--max-age", "60",
                "--etag",
                "--gzip",
                "--quiet",
            ],
        )
        assert result.exit_code == 0, result.stdout
        mock_run.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8080
        handler = mock_run.call_args.args[0].state.handler
        assert handler.context.server.max_age == 60
        assert handler.context.server.etag
        assert handler.context.server.gzip
        assert not handler.context.server.cors

    @patch("facesmith.cli.app.uvicorn.run")
    def test_short_flags(self, mock_run, library_dir, whitelist_file):
        result = runner.invoke(
            app,
            ["-b", ":9000", "-l", str(library_dir), "-w", str(whitelist_file), "-o", "-c", "5", "-q"],
        )
        assert result.exit_code == 0, result.stdout
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 9000
        server = mock_run.call_args.args[0].state.handler.context.server
        assert server.cors
        assert server.max_age == 5

    @patch("facesmith.cli.app.uvicorn.run")
    def test_missing_library(self, mock_run, tmp_path, whitelist_file):
        result = runner.invoke(
            app,
            ["--library", str(tmp_path / "missing"), "--whitelist", str(whitelist_file)],
        )
        assert result.exit_code == 1
        assert "not a directory" in " ".join(result.stdout.split())
        mock_run.assert_not_called()

    @patch("facesmith.cli.app.uvicorn.run")
    def test_missing_whitelist(self, mock_run, tmp_path, library_dir):
        result = runner.invoke(
            app,
            ["--library", str(library_dir), "--whitelist", str(tmp_path / "missing.json")],
        )
        assert result.exit_code == 1
        mock_run.assert_not_called()

    @pytest.mark.parametrize("bind", ["localhost", "host:port", "host:70000"])
    def test_invalid_bind(self, bind):
        result = runner.invoke(app, ["--bind", bind])
        assert result.exit_code == 1
        assert "Invalid bind address" in result.stdout

    def test_verbose_and_quiet(self):
        result = runner.invoke(app, ["--verbose", "--quiet"])
        assert result.exit_code == 1
