"""NBA assistant agent definitions."""
