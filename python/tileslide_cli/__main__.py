from tileslide_cli.main import app

app(prog_name="tileslide")
