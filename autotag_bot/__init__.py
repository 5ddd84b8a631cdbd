"""Tag and release a commit from the version found in a source file."""
