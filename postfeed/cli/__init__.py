"""
Command-line tools for the post feed core.
"""
