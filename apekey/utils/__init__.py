"""Utility modules for apekey."""
