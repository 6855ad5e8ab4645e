# Tests for the filejail command line.
# Created: 2026-10-12

from unittest.mock import patch

import pytest

from filejail.__main__ import build_parser, main
from filejail.config import reset_settings


@pytest.fixture(autouse=True)
def _clean(monkeypatch):
    monkeypatch.delenv("FILEJAIL_ROOT_DIRECTORY", raising=False)
    reset_settings()
    with patch("filejail.__main__.setup_logging"):
        yield
    reset_settings()


class TestParser:
    def test_root_is_positional(self):
        args = build_parser().parse_args(["/srv/share", "--port", "9000"])
        assert args.root == "/srv/share"
        assert args.port == 9000

    def test_root_is_optional(self):
        assert build_parser().parse_args([]).root is None


class TestMain:
    @patch("filejail.api.serve.run_api_server")
    def test_starts_server_with_root(self, mock_run, tmp_path):
        assert main([str(tmp_path), "--port", "9123"]) == 0
        settings = mock_run.call_args.args[0]
        assert settings.root_directory == tmp_path.resolve()
        assert settings.port == 9123
        assert mock_run.call_args.kwargs == {"dev": False}

    @patch("filejail.api.serve.run_api_server")
    def test_missing_root_falls_back_with_warning(self, mock_run, monkeypatch, tmp_path, caplog):
        monkeypatch.chdir(tmp_path)
        assert main([]) == 0
        assert mock_run.call_args.args[0].root_directory == tmp_path.resolve()
        assert "No root directory provided" in caplog.text

    @patch("filejail.api.serve.run_api_server")
    def test_nonexistent_root_aborts(self, mock_run, tmp_path):
        assert main([str(tmp_path / "missing")]) == 2
        mock_run.assert_not_called()
