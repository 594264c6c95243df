"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by base16_scheme.registry.discover().
"""
