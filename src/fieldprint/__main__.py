from fieldprint.cli import run

run()
