import pytest
import shutil
import tempfile
import textwrap
from pathlib import Path

SAMPLE_KUBECONFIG = textwrap.dedent("""\
    apiVersion: v1
    kind: Config
    preferences:
      colors: true
    clusters:
    - name: dev-cluster
      cluster:
        server: https://dev.example.com:6443
        certificate-authority-data: REVWQ0E=
    - name: prod-cluster
      cluster:
        server: https://prod.example.com:6443
        insecure-skip-tls-verify: false
    users:
    - name: dev-admin
      user:
        token: dev-token
    - name: prod-admin
      user:
        exec:
          apiVersion: client.authentication.k8s.io/v1beta1
          command: aws
          args: [eks, get-token, --cluster-name, prod]
    contexts:
    - name: dev
      context:
        cluster: dev-cluster
        user: dev-admin
        namespace: team-a
    - name: staging
      context:
        cluster: dev-cluster
    - name: prod
      context:
        cluster: prod-cluster
        user: prod-admin
    current-context: dev
    """)

@pytest.fixture(autouse=True)
def isolate_home(monkeypatch, temp_home):
    """Prevent tests from reading/writing the real ~/.kube/config."""
    monkeypatch.setenv("HOME", str(temp_home))
    monkeypatch.setenv("USERPROFILE", str(temp_home))
    monkeypatch.delenv("KUBECONFIG", raising=False)
    # Wide enough that rich never squeezes the fixed-width columns
    monkeypatch.setenv("COLUMNS", "200")

@pytest.fixture
def temp_home():
    """Create a temporary home directory for testing."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)

@pytest.fixture
def kubeconfig(tmp_path, monkeypatch):
    """A dev/staging/prod kubeconfig selected through KUBECONFIG."""
    path = tmp_path / "config"
    path.write_text(SAMPLE_KUBECONFIG)
    monkeypatch.setenv("KUBECONFIG", str(path))
    return path
