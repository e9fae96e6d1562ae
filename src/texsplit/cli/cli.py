"""CLI entrypoint: Typer app definition and command registration"""

import typer

from texsplit.cli.commands import compile_cmd, create_cmd, update_cmd


app = typer.Typer(name="texsplit", no_args_is_help=True, help="Split pandoc LaTeX journal parts into article fragments")

app.command(name="create")(create_cmd)
app.command(name="update")(update_cmd)
app.command(name="compile")(compile_cmd)
