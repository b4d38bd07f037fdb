"""Module-level constants for the Obsidian MCP bridge."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "obsidian.yaml"
CONFIG_PATH_ENV = "OBSIDIAN_CONFIG"
API_KEY_ENV = "OBSIDIAN_API_KEY"
URL_ENV = "OBSIDIAN_URL"
LOG_LEVEL_ENV = "OBSIDIAN_LOG_LEVEL"
DEFAULT_OBSIDIAN_URL = "http://localhost:27123"

# Server
SERVER_NAME = "mcp-obsidian"

# Recent changes
DEFAULT_RECENT_LIMIT = 10
DEFAULT_RECENT_DAYS = 30

# Logging
LOG_LEVEL = "INFO"
