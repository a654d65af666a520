from rum.cli.main import cli

cli()
