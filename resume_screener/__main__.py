"""
Main entry point for the resume_screener package.

Usage:
    python -m resume_screener [command] [options]

See 'python -m resume_screener --help' for available commands.
"""

from resume_screener.cli import main

if __name__ == "__main__":
    main()
