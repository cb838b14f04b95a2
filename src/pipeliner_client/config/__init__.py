"""Config – defaults, client settings and loaders."""
