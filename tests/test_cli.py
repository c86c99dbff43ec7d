"""Tests for Click CLI commands."""

import json

import httpx
import pytest
from click.testing import CliRunner

from nexus_tool.cli import cli, main

BASE_URL = "https://nexus.example.com"
SEARCH_URL = f"{BASE_URL}/service/rest/v1/search"
REPOSITORIES_URL = f"{BASE_URL}/service/rest/v1/repositories"


@pytest.fixture
def cli_env(tmp_path, monkeypatch, nexus_credentials):
    """Isolated home directory, NEXUS_URL set and credentials present."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("NEXUS_URL", BASE_URL)
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIHelp:
    """Test CLI help commands."""

    def test_main_help(self, runner):
        """Test main CLI help output."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Nexus Tool" in result.output
        assert "search" in result.output
        assert "download" in result.output
        assert "list-packages" in result.output
        assert "list-repositories" in result.output
        assert "--config" in result.output
        assert "--base-url" in result.output
        assert "--debug" in result.output

    def test_main_help_short_flag(self, runner):
        """Test main CLI help output with -h flag."""
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "-h, --help" in result.output

    def test_download_help(self, runner):
        """Test download command help output."""
        result = runner.invoke(cli, ["download", "--help"])
        assert result.exit_code == 0
        assert "--output-dir" in result.output
        assert "--all-pages" in result.output
        assert "--verify-checksums" in result.output

    def test_version(self, runner):
        """Test --version output."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "nexus-tool" in result.output

    def test_download_requires_package(self, runner, cli_env):
        """download needs at least a repository and a package."""
        result = runner.invoke(cli, ["download", "pypi-internal"])
        assert result.exit_code == 2
        assert "PACKAGE" in result.output


class TestSearchCommand:
    """Test the search and list-packages commands."""

    def test_search(self, runner, cli_env, httpx_mock, document_store_page):
        """Each item is printed on its own line."""
        route = httpx_mock.get(url__startswith=SEARCH_URL).mock(
            return_value=httpx.Response(200, json=document_store_page)
        )

        result = runner.invoke(cli, ["search", "pypi-internal", "document-store", "0.2.1"])

        assert result.exit_code == 0
        assert "document-store 0.2.1 (pypi, 2 asset(s))" in result.output
        assert route.calls.last.request.url.params["version"] == "0.2.1"

    def test_search_json(self, runner, cli_env, httpx_mock, document_store_page):
        """--json prints the items with their API field names."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=document_store_page))

        result = runner.invoke(cli, ["search", "pypi-internal", "document-store", "--json"])

        assert result.exit_code == 0
        items = json.loads(result.output)
        assert items[0]["name"] == "document-store"
        assert items[0]["assets"][0]["downloadUrl"].endswith(".whl")

    def test_search_not_found(self, runner, cli_env, httpx_mock, make_page):
        """An empty result is reported, not treated as an error."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=make_page([])))

        result = runner.invoke(cli, ["search", "pypi-internal", "missing"])

        assert result.exit_code == 0
        assert "No package found for repository=pypi-internal name=missing version=" in result.output

    def test_search_http_error(self, runner, cli_env, httpx_mock):
        """A failed search exits with status 1."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(401, text="Unauthorized"))

        result = runner.invoke(cli, ["search", "pypi-internal"])

        assert result.exit_code == 1

    def test_search_redirect_loop(self, runner, cli_env, httpx_mock):
        """A redirect loop is reported as a failure, not a traceback."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(
            side_effect=lambda request: httpx.Response(302, headers={"Location": str(request.url)})
        )

        result = runner.invoke(cli, ["search", "pypi-internal", "document-store"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_search_missing_credentials(self, runner, tmp_path, monkeypatch, no_credentials, httpx_mock):
        """Missing credentials exit with status 1 and send nothing."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("NEXUS_URL", BASE_URL)
        route = httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json={"items": []}))

        result = runner.invoke(cli, ["search", "pypi-internal"])

        assert result.exit_code == 1
        assert not route.called

    def test_search_missing_base_url(self, runner, tmp_path, monkeypatch, nexus_credentials):
        """Without a base URL anywhere the command fails."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("NEXUS_URL", raising=False)

        result = runner.invoke(cli, ["search", "pypi-internal"])

        assert result.exit_code == 1

    def test_base_url_option(self, runner, cli_env, httpx_mock, make_page):
        """--base-url overrides NEXUS_URL."""
        route = httpx_mock.get(url__startswith="https://other.example.com/service/rest/v1/search").mock(
            return_value=httpx.Response(200, json=make_page([]))
        )

        result = runner.invoke(cli, ["--base-url", "https://other.example.com", "search", "pypi-internal"])

        assert result.exit_code == 0
        assert route.called

    def test_config_file(self, runner, cli_env, httpx_mock, make_page):
        """--config supplies the base URL and path prefix."""
        config_file = cli_env / "custom.toml"
        config_file.write_text('[cli]\nbase_url = "https://file.example.com"\nurl_path = "/nexus/service/rest"\n')
        route = httpx_mock.get(url__startswith="https://file.example.com/nexus/service/rest/v1/search").mock(
            return_value=httpx.Response(200, json=make_page([]))
        )

        result = runner.invoke(cli, ["--config", str(config_file), "search", "pypi-internal"])

        assert result.exit_code == 0
        assert route.called

    def test_default_config_file(self, runner, cli_env, httpx_mock, make_page):
        """~/.config/nexus/cli.toml is used when present."""
        config_dir = cli_env / ".config" / "nexus"
        config_dir.mkdir(parents=True)
        (config_dir / "cli.toml").write_text('[cli]\nbase_url = "https://home.example.com"\n')
        route = httpx_mock.get(url__startswith="https://home.example.com/service/rest/v1/search").mock(
            return_value=httpx.Response(200, json=make_page([]))
        )

        result = runner.invoke(cli, ["search", "pypi-internal"])

        assert result.exit_code == 0
        assert route.called

    def test_list_packages(self, runner, cli_env, httpx_mock, make_page, make_item):
        """Package names are printed one per line, duplicates included."""
        pages = [
            make_page([make_item("alpha", "1.0"), make_item("alpha", "1.1")], token="t1"),
            make_page([make_item("beta", "2.0")]),
        ]
        httpx_mock.get(url__startswith=SEARCH_URL).mock(
            side_effect=[httpx.Response(200, json=page) for page in pages]
        )

        result = runner.invoke(cli, ["list-packages", "pypi-internal"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["alpha", "alpha", "beta"]


class TestListRepositoriesCommand:
    """Test the list-repositories command."""

    def test_list_repositories(self, runner, cli_env, httpx_mock, mock_repository_data):
        """Each repository is printed with its format and URL."""
        httpx_mock.get(REPOSITORIES_URL).mock(return_value=httpx.Response(200, json=mock_repository_data))

        result = runner.invoke(cli, ["list-repositories"])

        assert result.exit_code == 0
        assert f"pypi-internal pypi {BASE_URL}/repository/pypi-internal" in result.output
        assert "maven-central maven2" in result.output

    def test_list_repositories_json(self, runner, cli_env, httpx_mock, mock_repository_data):
        """--json prints the repository descriptors."""
        httpx_mock.get(REPOSITORIES_URL).mock(return_value=httpx.Response(200, json=mock_repository_data))

        result = runner.invoke(cli, ["list-repositories", "--json"])

        assert result.exit_code == 0
        assert [repo["name"] for repo in json.loads(result.output)] == ["pypi-internal", "maven-central"]

    def test_list_repositories_server_error(self, runner, cli_env, httpx_mock):
        """Server errors exit with status 1."""
        httpx_mock.get(REPOSITORIES_URL).mock(return_value=httpx.Response(500, text="boom"))

        result = runner.invoke(cli, ["list-repositories"])

        assert result.exit_code == 1


class TestDownloadCommand:
    """Test the download command."""

    def serve_assets(self, httpx_mock):
        base = f"{BASE_URL}/repository/pypi-internal/document-store/0.2.1"
        httpx_mock.get(f"{base}/document_store-0.2.1-py3-none-any.whl").mock(
            return_value=httpx.Response(200, content=b"wheel")
        )
        httpx_mock.get(f"{base}/document_store-0.2.1.tar.gz").mock(return_value=httpx.Response(200, content=b"sdist"))

    def test_download(self, runner, cli_env, httpx_mock, document_store_page):
        """Files are written to --output-dir and listed."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=document_store_page))
        self.serve_assets(httpx_mock)
        output_dir = cli_env / "downloads"

        result = runner.invoke(
            cli, ["download", "pypi-internal", "document-store", "0.2.1", "--output-dir", str(output_dir)]
        )

        assert result.exit_code == 0
        assert (output_dir / "document_store-0.2.1-py3-none-any.whl").read_bytes() == b"wheel"
        assert (output_dir / "document_store-0.2.1.tar.gz").read_bytes() == b"sdist"
        assert "2/2 asset(s) downloaded from 1 item(s)" in result.output

    def test_download_current_directory(self, runner, cli_env, httpx_mock, document_store_page, monkeypatch):
        """Without --output-dir files land in the working directory."""
        monkeypatch.chdir(cli_env)
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=document_store_page))
        self.serve_assets(httpx_mock)

        result = runner.invoke(cli, ["download", "pypi-internal", "document-store", "0.2.1"])

        assert result.exit_code == 0
        assert (cli_env / "document_store-0.2.1.tar.gz").exists()

    def test_download_not_found(self, runner, cli_env, httpx_mock, make_page):
        """Nothing to download is reported and exits 0."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=make_page([])))

        result = runner.invoke(cli, ["download", "pypi-internal", "document-store", "9.9.9"])

        assert result.exit_code == 0
        assert "No package found for repository=pypi-internal name=document-store version=9.9.9" in result.output

    def test_download_partial_failure(self, runner, cli_env, httpx_mock, document_store_page):
        """A failed asset is reported and the command exits 1."""
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=document_store_page))
        base = f"{BASE_URL}/repository/pypi-internal/document-store/0.2.1"
        httpx_mock.get(f"{base}/document_store-0.2.1-py3-none-any.whl").mock(
            return_value=httpx.Response(200, content=b"wheel")
        )
        httpx_mock.get(f"{base}/document_store-0.2.1.tar.gz").mock(return_value=httpx.Response(404, text="Not Found"))

        result = runner.invoke(
            cli, ["download", "pypi-internal", "document-store", "0.2.1", "--output-dir", str(cli_env)]
        )

        assert result.exit_code == 1
        assert "FAILED document-store/0.2.1/document_store-0.2.1.tar.gz [http]" in result.output
        assert (cli_env / "document_store-0.2.1-py3-none-any.whl").exists()

    def test_download_more_available(self, runner, cli_env, httpx_mock, document_store_page):
        """A truncated first page is pointed out."""
        document_store_page["continuationToken"] = "abc"
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=document_store_page))
        self.serve_assets(httpx_mock)

        result = runner.invoke(
            cli, ["download", "pypi-internal", "document-store", "--output-dir", str(cli_env)]
        )

        assert result.exit_code == 0
        assert "--all-pages" in result.output

    def test_download_verify_checksums(self, runner, cli_env, httpx_mock, make_page, make_item, make_asset):
        """--verify-checksums rejects corrupted downloads."""
        path = "pkg/1.0/pkg-1.0.whl"
        page = make_page([make_item("pkg", "1.0", [make_asset(path, b"expected")])])
        httpx_mock.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(200, json=page))
        httpx_mock.get(f"{BASE_URL}/repository/pypi-internal/{path}").mock(
            return_value=httpx.Response(200, content=b"corrupted")
        )

        result = runner.invoke(
            cli, ["download", "pypi-internal", "pkg", "1.0", "--output-dir", str(cli_env), "--verify-checksums"]
        )

        assert result.exit_code == 1
        assert "[checksum]" in result.output
        assert not (cli_env / "pkg-1.0.whl").exists()


def test_main_keyboard_interrupt(mocker, capsys):
    """Ctrl-C exits with status 130."""
    mocker.patch("nexus_tool.cli.cli", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 130
    assert "Operation cancelled by user" in capsys.readouterr().err
