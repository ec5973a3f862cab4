"""Bloglist backend package."""
