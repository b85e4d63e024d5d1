"""infrastructure package — file-system collaborators (parser, discovery)."""
