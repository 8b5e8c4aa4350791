from dentist_finder.cli.main import app

app(prog_name="dentist-finder")
