"""Shared helpers: dates, day counts, term sizing and numeric reductions."""
