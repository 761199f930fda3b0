"""Terminal output helpers for the streamenv CLI."""
