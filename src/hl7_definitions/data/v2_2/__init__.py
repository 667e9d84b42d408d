"""HL7 v2.2 definitions."""
