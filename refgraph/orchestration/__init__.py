"""Runtime helpers shared by the CLI and the pipeline."""
