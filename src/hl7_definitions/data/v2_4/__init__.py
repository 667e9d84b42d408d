"""HL7 v2.4 definitions."""
