from docdiff.cli.cli import app


app(prog_name="docdiff")
