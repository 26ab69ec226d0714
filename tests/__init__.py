"""The layoutgrid test suite."""
