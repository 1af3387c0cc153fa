"""Rules about where spec files live."""
