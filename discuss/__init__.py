"""Discuss: a forum backend with topics, posts and threaded comments."""
