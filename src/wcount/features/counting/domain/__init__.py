"""Domain values and errors for the counting feature."""
