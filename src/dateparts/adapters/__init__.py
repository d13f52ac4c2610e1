"""Adapters that feed external input into the date-part checks."""
