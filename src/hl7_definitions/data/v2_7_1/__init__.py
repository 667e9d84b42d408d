"""HL7 v2.7.1 definitions."""
