"""Command-line host for the subject classifier."""
