"""Users app: fetch, validate and publish the remote user list."""
