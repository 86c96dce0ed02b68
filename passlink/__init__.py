"""passlink - Bible reference to passage link formatter."""
