"""Publish verification sweep for build artifacts."""
