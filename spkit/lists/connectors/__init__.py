"""Remote list store connectors."""
