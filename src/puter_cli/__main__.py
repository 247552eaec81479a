from puter_cli.cli.main import run

run()
