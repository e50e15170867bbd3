"""Core logic for configuring deployment environments and their required reviewers."""
