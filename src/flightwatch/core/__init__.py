"""Core services: flight query, poll loop, watcher, event bus."""
