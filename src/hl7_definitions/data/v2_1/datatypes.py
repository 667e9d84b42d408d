# src/hl7_definitions/data/v2_1/datatypes.py
"""HL7 v2.1 composite data types."""

DATATYPES = {
    "AD": (
        "Address",
        (
            ("ST", "Street address", "O", 1, None, None),
            ("ST", "Other designation", "O", 1, None, None),
            ("ST", "City", "O", 1, None, None),
            ("ST", "State or province", "O", 1, None, None),
            ("ID", "Zip Or Postal Code", "O", 1, None, None),
            ("ID", "Country", "O", 1, None, None),
        ),
    ),
    "CE": (
        "Coded element",
        (
            ("ID", "Identifier", "O", 1, None, None),
            ("ST", "Text", "O", 1, None, None),
            ("ST", "Name of coding system", "O", 1, None, None),
            ("ST", "Alternate identifier", "O", 1, None, None),
            ("ST", "Alternate text", "O", 1, None, None),
            ("ST", "Name of alternate coding system", "O", 1, None, None),
        ),
    ),
    "CK": (
        "Composite ID with check digit",
        (
            ("NM", "ID number", "O", 1, None, None),
            ("NM", "Check digit", "O", 1, None, None),
            (
                "ID",
                "Code identifying the check digit scheme employed",
                "O",
                1,
                None,
                "0061",
            ),
        ),
    ),
    "CM_MSG": (
        "Message Type",
        (
            ("ID", "Message Type", "O", 1, None, None),
            ("ID", "Trigger Event", "O", 1, None, None),
        ),
    ),
    "CN": (
        "Composite ID number and name",
        (
            ("ID", "ID number", "O", 1, None, None),
            ("ST", "Family name", "O", 1, None, None),
            ("ST", "Given name", "O", 1, None, None),
            ("ST", "Middle initial or name", "O", 1, None, None),
            ("ST", "Suffix", "O", 1, None, None),
        ),
    ),
    "CQ": (
        "Composite Quantity with Units",
        (("ST", "Quantity", "O", 1, None, None), ("ST", "Units", "O", 1, None, None)),
    ),
    "PN": (
        "Person name",
        (
            ("ST", "Family name", "O", 1, None, None),
            ("ST", "Given name", "O", 1, None, None),
            ("ST", "Middle initial or name", "O", 1, None, None),
            ("ST", "Suffix", "O", 1, None, None),
            ("ST", "Prefix", "O", 1, None, None),
            ("ST", "Degree", "O", 1, None, None),
        ),
    ),
    "TS": (
        "Time Stamp",
        (
            ("ST", "Time Of Event", "R", 1, None, None),
            ("ST", "Degree Of Precision", "R", 1, None, None),
        ),
    ),
}
