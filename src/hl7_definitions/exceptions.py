# src/hl7_definitions/exceptions.py
"""
Custom exceptions for hl7_definitions.

Lookups never raise: an unknown version, message type, segment or table
simply yields None. The exceptions below cover the two places where
something can genuinely be wrong: the feature configuration handed to the
registry, and the literal data shipped in a version partition.
"""


class HL7DefinitionsError(Exception):
    """Base class for all hl7_definitions exceptions."""

    pass


class ConfigError(HL7DefinitionsError):
    """Raised when a feature configuration names unknown features or is malformed."""

    pass


class DefinitionDataError(HL7DefinitionsError):
    """Raised when a data partition contains a malformed literal entry."""

    pass
