import sys
import typer
from kube_context_switcher.core.output import OutputManager
from kube_context_switcher.core.exceptions import KubeSwitchError
from kube_context_switcher.commands import context, tui

app = typer.Typer(
    name="kube-context",
    help="Kube Context Switcher - Pick the current context of your kubeconfig.",
    add_completion=False,
)

# Register TUI commands
app.command(name="tui", help="Interactive context picker")(tui.tui_cmd)
app.command(name="interactive", help="Alias for tui")(tui.tui_cmd)

# Register context commands at root level (kube-context switch vs kube-context context switch)
app.command(name="switch", help="Switch current context")(context.switch)
app.command(name="current", help="Show current context")(context.current)
app.command(name="list", help="List all contexts")(context.list_contexts)

@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """
    Kube Context Switcher - Pick the current context of your kubeconfig.
    -------------------------------------------------------------------
    Run without a command to open the picker. KUBECONFIG selects the file.
    """
    ctx.obj = OutputManager()

    # Bare invocation opens the picker
    if ctx.invoked_subcommand is None:
        tui.tui_cmd(ctx)

def main():
    try:
        app()
    except KubeSwitchError as e:
        # Known domain error - clean exit
        # Use stderr for visibility without polluting stdout
        sys.stderr.write(f"\033[91mError: {e.message}\033[0m\n")
        sys.exit(e.code)
    except Exception as e:
        # Unexpected error firewall
        sys.stderr.write(f"\033[91mUnexpected Error: {str(e)}\033[0m\n")
        sys.exit(1)

if __name__ == "__main__":
    main()  # pragma: no cover
