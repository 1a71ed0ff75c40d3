"""Terminal hosts that run the editor loop."""
