"""
aegis.core — configuration, constants, exceptions, and logging shared by the
policy layer and the CLI.

Modules:
    config      Configuration loading (TOML + env vars)
    constants   Naming convention, exit codes, filesystem layout
    exceptions  Aegis exception hierarchy
    logging     stdlib logging setup
"""
