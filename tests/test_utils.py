import os
import pytest
from kube_context_switcher.core.utils import atomic_write, truncate

def test_atomic_write_new_file_permissions(tmp_path):
    target = tmp_path / "config"
    
    with atomic_write(target) as f:
        f.write("secret")
        
    assert target.read_text() == "secret"
    
    # stat.st_mode includes file type bits, so we mask with 0o777
    mode = os.stat(target).st_mode & 0o777
    assert mode == 0o600, f"Expected 0600, got {oct(mode)}"

def test_atomic_write_cleans_up_on_error(tmp_path):
    target = tmp_path / "config"
    target.write_text("original")

    with pytest.raises(RuntimeError):
        with atomic_write(target) as f:
            f.write("partial")
            raise RuntimeError("interrupted")

    assert target.read_text() == "original"
    assert not (tmp_path / "config.tmp").exists()

@pytest.mark.parametrize("value,expected", [
    ("dev", "dev"),
    ("x" * 30, "x" * 30),
    ("x" * 31, "x" * 29 + "…"),
    ("", ""),
    (None, "-"),
])
def test_truncate(value, expected):
    assert truncate(value) == expected

def test_truncate_exact_width():
    out = truncate("abcdefghij", width=5)
    assert out == "abcd…"
    assert len(out) == 5
