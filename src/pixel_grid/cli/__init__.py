"""Command line interface for pixel-grid."""
