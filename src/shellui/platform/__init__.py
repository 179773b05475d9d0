"""Platform adapters: logging bootstrap and terminal detection."""
