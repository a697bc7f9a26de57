"""Keep virtual branches declared in GitHub issues in sync with git."""
