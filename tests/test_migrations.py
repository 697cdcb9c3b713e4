import importlib.util
from pathlib import Path
from unittest.mock import MagicMock

import pytest

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "alembic" / "versions"


def _load_revision(filename: str):
    module_spec = importlib.util.spec_from_file_location(
        filename.removesuffix(".py"), VERSIONS_DIR / filename
    )
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def trigger_revision(monkeypatch):
    module = _load_revision("c3d4e5f6a7b8_drop_legacy_listing_status_trigger.py")
    monkeypatch.setattr(module, "op", MagicMock())
    return module


class TestLegacyTriggerRevision:
    def test_upgrade_drops_trigger_and_function(self, trigger_revision):
        trigger_revision.upgrade()

        statements = [c.args[0] for c in trigger_revision.op.execute.call_args_list]
        assert any("DROP TRIGGER IF EXISTS" in s for s in statements)
        assert any("DROP FUNCTION IF EXISTS" in s for s in statements)

    def test_downgrade_installs_nothing(self, trigger_revision):
        """The flush hook keeps owning the rule after a downgrade."""
        trigger_revision.downgrade()

        trigger_revision.op.execute.assert_not_called()

    def test_chain(self, trigger_revision):
        assert trigger_revision.down_revision == "b2c3d4e5f6a7"
