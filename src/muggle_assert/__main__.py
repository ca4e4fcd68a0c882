from muggle_assert.cli import app

app()
