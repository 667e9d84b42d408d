"""HL7 v2.3.1 definitions."""
