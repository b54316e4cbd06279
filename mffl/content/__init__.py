"""Locally stored league content (announcements, suggestions, bulletin board, spiff bank)."""
