"""Infrastructure layer — filesystem walks, subprocesses, temp workspaces."""
