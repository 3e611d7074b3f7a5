from panmon.cli import app

app()
