"""application package — audit orchestration and reporting."""
