"""
CLI entry point for the geohash-index command.

This provides a user-friendly command-line interface for the geohash tools.
"""
import sys

from geohash_index.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    sys.exit(main())
