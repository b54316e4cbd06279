"""Sleeper league payload models and the roster/team joiner."""
