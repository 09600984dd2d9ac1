"""Tests for kasten.core.vaults."""

import pytest

from kasten.core.settings import ConfigError
from kasten.core.vaults import select_vault


class TestSelectVault:
    """Tests for select_vault() decision order."""

    def test_explicit_default_vault(self, multi_vault_input):
        """default_vault picks the named registry entry."""
        selection = select_vault(multi_vault_input)

        assert selection.name == "personal"
        assert selection.overrides == {"home": "/p", "extension": ".txt"}
        assert set(selection.registry) == {"work", "personal"}

    def test_routing_keys_not_in_registry(self, multi_vault_input):
        """Registry entries never carry vaults/default_vault."""
        multi_vault_input["vaults"]["work"]["vaults"] = {"nested": {}}

        selection = select_vault(multi_vault_input)

        for entry in selection.registry.values():
            assert "vaults" not in entry
            assert "default_vault" not in entry
        assert "home" not in selection.registry

    def test_default_entry(self):
        """A vault named default is used without default_vault."""
        selection = select_vault({"vaults": {"default": {"home": "/d"}, "other": {"home": "/o"}}})

        assert selection.name == "default"
        assert selection.overrides["home"] == "/d"

    def test_default_vault_beats_default_entry(self):
        """An explicit default_vault wins over the default entry."""
        selection = select_vault(
            {
                "vaults": {"default": {"home": "/d"}, "other": {"home": "/o"}},
                "default_vault": "other",
            }
        )

        assert selection.name == "other"

    def test_single_vault_shorthand(self):
        """A top-level home is the single vault named default."""
        selection = select_vault({"home": "/notes", "extension": ".txt"})

        assert selection.name == "default"
        assert selection.registry == {"default": {"home": "/notes", "extension": ".txt"}}
        assert selection.overrides == {"home": "/notes", "extension": ".txt"}

    def test_shorthand_joins_named_vaults(self):
        """Shorthand input is added next to vaults without a default."""
        selection = select_vault({"home": "/notes", "vaults": {"work": {"home": "/w"}}})

        assert selection.name == "default"
        assert set(selection.registry) == {"default", "work"}
        assert "vaults" not in selection.registry["default"]

    def test_nothing_to_select(self):
        """No home and no vaults is a configuration error."""
        with pytest.raises(ConfigError, match="home"):
            select_vault({"extension": ".md"})

    def test_none_input(self):
        """No input at all is a configuration error."""
        with pytest.raises(ConfigError):
            select_vault(None)

    def test_vaults_without_default(self):
        """Vaults with neither default nor default_vault cannot be selected."""
        with pytest.raises(ConfigError, match="No vault"):
            select_vault({"vaults": {"work": {"home": "/w"}}})

    def test_unknown_default_vault(self, multi_vault_input):
        """default_vault must name a registered vault."""
        multi_vault_input["default_vault"] = "archive"

        with pytest.raises(ConfigError, match="archive"):
            select_vault(multi_vault_input)

    def test_vault_without_home(self):
        """The selected vault must define home."""
        with pytest.raises(ConfigError, match="'work' does not define 'home'"):
            select_vault({"vaults": {"work": {"extension": ".md"}}, "default_vault": "work"})

    def test_vault_entry_not_mapping(self):
        """Vault entries must be mappings."""
        with pytest.raises(ConfigError, match="must be a mapping"):
            select_vault({"vaults": {"default": "/d"}})

    def test_debug_from_top_level(self, multi_vault_input):
        """A top-level debug flag applies to the selected vault."""
        multi_vault_input["debug"] = True

        assert select_vault(multi_vault_input).debug is True

    def test_debug_from_vault_entry(self):
        """debug in the vault entry is honored but not passed on as a setting."""
        selection = select_vault({"home": "/notes", "debug": True})

        assert selection.debug is True
        assert "debug" not in selection.overrides

    def test_registry_is_a_copy(self, multi_vault_input):
        """Changing the input afterwards does not change the registry."""
        selection = select_vault(multi_vault_input)

        multi_vault_input["vaults"]["work"]["home"] = "/changed"

        assert selection.registry["work"]["home"] == "/w"
