"""Scenes pushed onto the app's scene stack."""
