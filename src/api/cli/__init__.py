"""CLI do events-card (ponto de entrada: api.cli.main:main)."""
