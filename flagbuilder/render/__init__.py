"""Presentation helpers: standalone SVG previews."""
