from selectctl.commands import cli

cli()
