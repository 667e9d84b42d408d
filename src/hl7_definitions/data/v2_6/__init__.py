"""HL7 v2.6 definitions."""
