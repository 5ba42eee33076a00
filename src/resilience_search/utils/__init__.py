"""Display helpers shared by the service layer and the CLI."""
