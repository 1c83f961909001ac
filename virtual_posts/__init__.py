"""On-the-fly virtual posts for the post query pipeline."""
