"""Client for talking to a running TaskFlow server."""
