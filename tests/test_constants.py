import os
from pathlib import Path
from kube_context_switcher.config.constants import resolve_kubeconfig_path

def test_default_path(temp_home):
    assert resolve_kubeconfig_path({}) == Path(os.path.expanduser("~/.kube/config"))
    assert resolve_kubeconfig_path({}) == temp_home / ".kube" / "config"

def test_env_override():
    assert resolve_kubeconfig_path({"KUBECONFIG": "/tmp/kc"}) == Path("/tmp/kc")

def test_env_override_first_entry_only():
    value = os.pathsep.join(["/tmp/first", "/tmp/second"])
    assert resolve_kubeconfig_path({"KUBECONFIG": value}) == Path("/tmp/first")

def test_empty_env_falls_back(temp_home):
    assert resolve_kubeconfig_path({"KUBECONFIG": ""}) == temp_home / ".kube" / "config"

def test_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("KUBECONFIG", str(tmp_path / "kc"))
    assert resolve_kubeconfig_path() == tmp_path / "kc"

def test_expands_user(temp_home):
    assert resolve_kubeconfig_path({"KUBECONFIG": "~/alt"}) == temp_home / "alt"
