"""Helpers shared across components: configuration, errors and path rules."""
