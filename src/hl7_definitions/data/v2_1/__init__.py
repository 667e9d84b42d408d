"""HL7 v2.1 definitions."""
