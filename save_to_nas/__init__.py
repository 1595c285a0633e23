"""Save-to-NAS: MCP server for listing NAS shares and saving files onto them."""

__version__ = "2.0.0"
