"""
Import isolation tests.

The resolution engine must import without the Pulumi stack layer; only
``infra_config.configs.environment`` needs the pulumi package.
"""

import importlib
import sys

import pytest


@pytest.fixture
def without_pulumi(monkeypatch):
    """Make ``import pulumi`` fail and drop cached infra_config modules."""
    monkeypatch.setitem(sys.modules, "pulumi", None)
    for name in [name for name in sys.modules if name.split(".")[0] == "infra_config"]:
        monkeypatch.delitem(sys.modules, name)


class TestEngineImports:
    """Tests for importing the engine without Pulumi."""

    @pytest.mark.parametrize(
        "module_name",
        [
            "infra_config",
            "infra_config.configs",
            "infra_config.core.resolver",
            "infra_config.core.name_generator",
            "infra_config.utils",
        ],
    )
    def test_engine_imports_without_pulumi(self, without_pulumi, module_name) -> None:
        """Engine modules load with pulumi unavailable."""
        importlib.import_module(module_name)

        assert "infra_config.configs.environment" not in sys.modules

    def test_stack_loader_requires_pulumi(self, without_pulumi) -> None:
        """The stack loader is the only module that needs pulumi."""
        with pytest.raises(ImportError):
            importlib.import_module("infra_config.configs.environment")
