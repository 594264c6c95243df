"""base16_scheme.core — Foundation layer.

Contains the value types, field parser, color formatter, HSL conversion,
scheme model, env loading and report builder.
This module has NO dependencies on base16_scheme.commands or base16_scheme.registry.
Only stdlib, numpy and PyYAML are allowed here.
"""
