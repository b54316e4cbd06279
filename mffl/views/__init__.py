"""View assemblers: pure functions from joined upstream data to view models."""
