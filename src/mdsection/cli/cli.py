"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdsection.cli.commands import classes_cmd, render_cmd, tree_cmd


app = typer.Typer(name="mdsection", no_args_is_help=True, help="Wrap markdown heading scopes in nested <section> elements")

app.command(name="render")(render_cmd)
app.command(name="tree")(tree_cmd)
app.command(name="classes")(classes_cmd)
