"""
Core functionality for the YouTube video summary application.

This package contains modules for extracting video IDs, fetching video
metadata, and summarizing the resulting content.
"""
