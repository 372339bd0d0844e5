from typer.testing import CliRunner
from docdiff.cli.cli import app

def test_cli_smoke():
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("diff", "compare", "revert-line", "rollback"):
        assert name in result.output
