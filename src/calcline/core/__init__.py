"""calcline core: IR types, errors, and the expression pipeline."""
