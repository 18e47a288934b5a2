"""Render templates for dynamic blocks, one module per block namespace."""
