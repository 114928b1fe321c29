import typer
from kube_context_switcher.config.constants import resolve_kubeconfig_path
from kube_context_switcher.config.manager import KubeconfigManager
from kube_context_switcher.core.output import OutputManager
from kube_context_switcher.core.exceptions import KubeSwitchError
from kube_context_switcher.core.selector import ContextSelector, Outcome

def tui_cmd(ctx: typer.Context):
    """
    Interactive terminal interface for switching the current context.
    """
    output: OutputManager = ctx.obj or OutputManager()
    mgr = KubeconfigManager(resolve_kubeconfig_path())

    try:
        # The picker draws on stderr so stdout stays pipeable
        result = ContextSelector(mgr, console=output.console).run()
    except KeyboardInterrupt:
        output.log("\nCancelled.")
        raise typer.Exit(0)
    except KubeSwitchError as e:
        output.error(e.message)
        raise typer.Exit(code=e.code)

    if result.outcome == Outcome.EMPTY:
        output.warn(f"No contexts found in '{mgr.path}'.")
    elif result.outcome == Outcome.SWITCHED:
        output.success(f"Switched to context '{result.context_name}'.")
