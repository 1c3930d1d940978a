from seodex.cli.main import app

app()
