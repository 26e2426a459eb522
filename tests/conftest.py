import pytest

from chronicle import identity


@pytest.fixture(autouse=True)
def product_identity():
    """
    Gives every test a known process-wide identity and restores a clean state afterwards.
    Tests that need the unset state call `identity.reset_product_info()` themselves.
    """
    info = identity.override_product_info("Acme", "Chronicle Tests", "0.1.0")
    yield info
    identity.reset_product_info()


@pytest.fixture
def no_product_env(monkeypatch):
    """Removes CHR_PRODUCT_* variables so settings resolve to an empty identity."""
    for var in ("CHR_PRODUCT_COMPANY", "CHR_PRODUCT_NAME", "CHR_PRODUCT_VERSION", "CHR_PRODUCT_DISTRIBUTION"):
        monkeypatch.delenv(var, raising=False)
    identity.reset_product_info()
