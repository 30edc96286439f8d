"""Desktop simulator."""
