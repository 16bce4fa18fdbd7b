from ornithologist.cli import app

app(prog_name="ornithologist")
