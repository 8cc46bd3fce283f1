from gdocs_markdown.cli import app

app()
