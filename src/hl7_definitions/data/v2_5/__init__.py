"""HL7 v2.5 definitions."""
