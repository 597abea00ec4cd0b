from pathlib import Path

from click.testing import CliRunner

from curl2py.cli import main
from curl2py.samples import SAMPLE_COMMANDS

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliConvert:
    def test_convert_argument(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl 'https://x.com' -H 'Accept: json'"])

        assert result.exit_code == 0
        assert result.output.startswith("import requests\n")
        assert "response = requests.get(" in result.output

    def test_convert_from_stdin(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert"], input="curl https://x.com \\\n  -d 'a=1'\n")

        assert result.exit_code == 0
        assert "requests.post(" in result.output

    def test_convert_from_file(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "-f", str(FIXTURES / "chrome_copy.curl"),
            "-l", "httpx_sync",
        ])

        assert result.exit_code == 0
        assert "httpx.post(" in result.output
        assert "cookies = {'sid': '42', 'theme': 'dark'}" in result.output

    def test_flags_map_to_options(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "curl https://x.com",
            "--library", "aiohttp",
            "--no-imports",
            "--no-wrap-async",
            "--error-handling",
        ])

        assert result.exit_code == 0
        assert "import" not in result.output
        assert result.output.startswith("try:\n")
        assert "except aiohttp.ClientError as e:" in result.output

    def test_session_flag(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "--session"])

        assert result.exit_code == 0
        assert "with requests.Session() as session:" in result.output

    def test_example(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "--example", "2"])

        assert result.exit_code == 0
        assert "json=data" in result.output
        assert "data = {'name': 'John'}" in result.output

    def test_wrap_async_on_sync_library_noted(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "--wrap-async"])

        assert result.exit_code == 0
        assert "--wrap-async has no effect on requests" in result.output
        assert "requests.get(" in result.output

    def test_wrap_async_on_async_library_silent(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "-l", "aiohttp", "--no-wrap-async"])

        assert result.exit_code == 0
        assert "no effect" not in result.output


class TestCliErrors:
    def test_not_a_curl_command(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "wget https://x.com"])

        assert result.exit_code != 0
        assert 'Command must start with "curl"' in result.output

    def test_missing_url(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl -H 'A: b'"])

        assert result.exit_code != 0
        assert "URL not found" in result.output

    def test_empty_input(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert"], input="   \n")

        assert result.exit_code == 2
        assert "No cURL command given" in result.output

    def test_bad_library_choice(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "-l", "urllib"])

        assert result.exit_code == 2

    def test_bad_config(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "curl https://x.com",
            "--config", str(FIXTURES / "bad_config.yaml"),
        ])

        assert result.exit_code != 0
        assert "Invalid YAML" in result.output

    def test_example_with_command_rejected(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "--example", "1"])

        assert result.exit_code == 2
        assert "Give only one of COMMAND, --file or --example" in result.output

    def test_file_with_example_rejected(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert",
            "--file", str(FIXTURES / "chrome_copy.curl"),
            "--example", "2",
        ])

        assert result.exit_code == 2

    def test_dash_with_example_allowed(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "-", "--example", "1"])

        assert result.exit_code == 0


class TestCliConfig:
    def test_config_file_defaults(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "curl https://x.com",
            "--config", str(FIXTURES / "config.yaml"),
        ])

        assert result.exit_code == 0
        assert result.output.startswith("with httpx.Client() as client:\n")

    def test_flag_overrides_config(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "curl https://x.com",
            "--config", str(FIXTURES / "config.yaml"),
            "--no-session",
            "--imports",
        ])

        assert result.exit_code == 0
        assert result.output.startswith("import httpx\n")
        assert "response = httpx.get(" in result.output


class TestCliOutput:
    def test_output_file(self, tmp_path):
        output_file = tmp_path / "out" / "req.py"
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com", "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.exists()
        assert "requests.get(" in output_file.read_text(encoding="utf-8")

    def test_output_directory_uses_default_name(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", "curl https://x.com",
            "-l", "httpx_async",
            "-o", str(tmp_path),
        ])

        assert result.exit_code == 0
        saved = tmp_path / "request-httpx-async.py"
        assert saved.exists()
        assert "asyncio.run(main())" in saved.read_text(encoding="utf-8")

    def test_check_passes(self):
        runner = CliRunner()
        result = runner.invoke(main, ["convert", "curl https://x.com -X PURGE", "--check"])

        assert result.exit_code == 0
        assert "requests.request(" in result.output


class TestCliExamples:
    def test_lists_samples(self):
        runner = CliRunner()
        result = runner.invoke(main, ["examples"])

        assert result.exit_code == 0
        for n, sample in enumerate(SAMPLE_COMMANDS, start=1):
            assert f"{n}. {sample}" in result.output
