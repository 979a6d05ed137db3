"""Core application support: paths, settings and theming."""
