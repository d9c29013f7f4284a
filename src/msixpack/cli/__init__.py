"""msixpack command line interface."""
