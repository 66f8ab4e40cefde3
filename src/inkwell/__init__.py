"""Inkwell: a blog backend with accounts, posts and comments."""
