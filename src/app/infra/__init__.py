"""Infra — implementações concretas de IO (stores)."""
