from shotit.main import cli

cli(prog_name="shotit")
