"""HL7 v2.3 definitions."""
