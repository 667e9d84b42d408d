"""HL7 v2.7 definitions."""
