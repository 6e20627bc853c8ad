"""
calc CLI - host for the calcbrain engine

Commands:
- calc eval - Evaluate inputs given on the command line
- calc replay - Re-evaluate a program saved as JSON
- calc repl - Interactive session
- calc operations - List recognized symbols
"""

__version__ = "0.1.0"
