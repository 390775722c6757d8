"""
aegis.cli — Click-based CLI entry point and command handlers.

Commands:
    init        Write a default configuration file
    policies    List registered policies, resolve a type to its policy
    version     Show version information
"""
