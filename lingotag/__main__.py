from lingotag_cli.main import run

run()
