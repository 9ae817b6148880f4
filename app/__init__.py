"""Process entry point and configuration of the console game."""
