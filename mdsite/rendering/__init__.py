"""Markdown conversion, title extraction and page rendering."""
