"""Remote vault access for the Obsidian Local REST API."""

from obsidian_bridge.core.obsidian_client import ObsidianClient, vault_endpoint

__all__ = ["ObsidianClient", "vault_endpoint"]
