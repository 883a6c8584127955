"""Adaptateur CLI (typer + rich)."""
