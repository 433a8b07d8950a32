import sys

import pytest

PACKAGE_NAME = "ckb_hex"


def _package_modules():
    return [
        m for m in sys.modules if m == PACKAGE_NAME or m.startswith(PACKAGE_NAME + ".")
    ]


@pytest.fixture(autouse=True)
def permissive_default(monkeypatch):
    monkeypatch.delenv("CKB_HEX_STRICT", raising=False)
    monkeypatch.setattr("ckb_hex.utils.STRICT", False)


@pytest.fixture
def restore_modules():
    """Puts the original ckb_hex modules back after a test re-imports them."""
    saved = {m: sys.modules[m] for m in _package_modules()}
    try:
        yield
    finally:
        for m in _package_modules():
            sys.modules.pop(m)
        sys.modules.update(saved)
        for name, module in saved.items():
            parent, _, child = name.rpartition(".")
            if parent:
                setattr(saved[parent], child, module)
