"""Developer tooling: debug timing hooks and the ``report`` CLI."""
