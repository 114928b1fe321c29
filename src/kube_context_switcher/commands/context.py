import typer
from rich.table import Table
from kube_context_switcher.config.constants import CURRENT_MARKER, resolve_kubeconfig_path
from kube_context_switcher.config.manager import KubeconfigManager
from kube_context_switcher.core.output import OutputManager
from kube_context_switcher.core.exceptions import KubeSwitchError, ContextNotFoundError
from kube_context_switcher.core.selector import build_table

def switch(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the context to switch to"),
):
    """
    Switch the current context without opening the picker.
    """
    output: OutputManager = ctx.obj or OutputManager()
    mgr = KubeconfigManager(resolve_kubeconfig_path())

    try:
        if name not in mgr.context_names():
            raise ContextNotFoundError(name)
        mgr.save(name)
        output.success(f"Switched to context '{name}'.")
    except KubeSwitchError as e:
        output.error(e.message)
        raise typer.Exit(code=e.code)

def current(ctx: typer.Context):
    """
    Print the current context.
    """
    output: OutputManager = ctx.obj or OutputManager()
    mgr = KubeconfigManager(resolve_kubeconfig_path())

    try:
        _, current_name = mgr.load()
    except KubeSwitchError as e:
        output.error(e.message)
        raise typer.Exit(code=e.code)

    if current_name:
        output.print(current_name)
    else:
        output.warn("No current context set.")

def list_contexts(ctx: typer.Context):
    """
    List all contexts. The current one is marked with (*).
    """
    output: OutputManager = ctx.obj or OutputManager()
    mgr = KubeconfigManager(resolve_kubeconfig_path())

    try:
        records, current_name = mgr.load()
    except KubeSwitchError as e:
        output.error(e.message)
        raise typer.Exit(code=e.code)

    if not records:
        output.warn(f"No contexts found in '{mgr.path}'.")
        return

    table: Table = build_table(records, current_name)
    table.caption = f"{CURRENT_MARKER} current context"
    output.print(table)
