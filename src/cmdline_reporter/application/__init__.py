"""Application layer: rendering primitives, formatters, tables."""
