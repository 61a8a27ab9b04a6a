"""Infrastructure layer — external processes and the workspace context."""
