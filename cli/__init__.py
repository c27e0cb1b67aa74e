"""Interactive command-line client for Ge.tt."""
