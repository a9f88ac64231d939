"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import load_cmd, root_callback, search_cmd, show_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store: load, search, and look up documents")

app.callback()(root_callback)
app.command(name="load")(load_cmd)
app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
