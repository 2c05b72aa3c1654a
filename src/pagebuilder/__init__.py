"""Headless core of a visual page-layout editor: surface model and exporters."""
