"""Exceptions raised by the script generation layer."""


class GenerationError(Exception):
    """Script generation failed; the previous configuration is untouched."""


class ScriptParseError(GenerationError, ValueError):
    """The generator answered, but not with a usable script."""
