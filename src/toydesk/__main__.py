from toydesk.cli.app import cli

cli()
