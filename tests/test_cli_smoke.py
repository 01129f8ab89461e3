from typer.testing import CliRunner
from wikidoc.cli.cli import app

def test_cli_smoke():
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("preview", "check", "show", "search", "export"):
        assert command in result.output
