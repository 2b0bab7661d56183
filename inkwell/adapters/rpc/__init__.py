"""gRPC frontend for the blog service."""
