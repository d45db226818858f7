"""releasestats – Core configuration, logging and calendar utilities."""
