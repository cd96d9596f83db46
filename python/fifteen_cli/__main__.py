from fifteen_cli.main import app

app(prog_name="fifteen")
