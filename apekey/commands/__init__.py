"""CLI commands for apekey."""
