# src/hl7_definitions/data/v2_7/datatypes.py
"""HL7 v2.7 composite data types."""

DATATYPES = {
    "AD": (
        "Address",
        (
            ("ST", "Street Address", "O", 1, 120, None),
            ("ST", "Other Designation", "O", 1, 120, None),
            ("ST", "City", "O", 1, 50, None),
            ("ST", "State or Province", "O", 1, 50, None),
            ("ST", "Zip or Postal Code", "O", 1, 12, None),
            ("ID", "Country", "O", 1, 3, "0399"),
            ("ID", "Address Type", "O", 1, 3, "0190"),
            ("ST", "Other Geographic Designation", "O", 1, 50, None),
        ),
    ),
    "AUI": (
        "Authorization Information",
        (
            ("ST", "Authorization Number", "O", 1, None, None),
            ("DT", "Date", "O", 1, None, None),
            ("ST", "Source", "O", 1, None, None),
        ),
    ),
    "CCD": (
        "Charge Code and Date",
        (
            ("ID", "Invocation Event", "R", 1, None, None),
            ("DTM", "Date Time", "O", 1, None, None),
        ),
    ),
    "CCP": (
        "Channel Calibration Parameters",
        (
            (
                "NM",
                "Channel Calibration Sensitivity Correction Factor",
                "O",
                1,
                None,
                None,
            ),
            ("NM", "Channel Calibration Baseline", "O", 1, None, None),
            ("NM", "Channel Calibration Time Skew", "O", 1, None, None),
        ),
    ),
    "CD": (
        "Channel Definition",
        (
            ("WVI", "Channel Identifier", "O", 1, None, None),
            ("WVS", "Waveform Source", "O", 1, None, None),
            ("CSU", "Channel Sensitivity And Units", "O", 1, None, None),
            ("CCP", "Channel Calibration Parameters", "O", 1, None, None),
            ("NM", "Channel Sampling Frequency", "O", 1, None, None),
            ("NR", "Minimum And Maximum Data Values", "O", 1, None, None),
        ),
    ),
    "CF": (
        "Coded Element with Formatted Values",
        (
            ("ST", "Identifier", "O", 1, None, None),
            ("FT", "Formatted Text", "O", 1, None, None),
            ("ID", "Name Of Coding System", "O", 1, None, None),
            ("ST", "Alternate Identifier", "O", 1, None, None),
            ("FT", "Alternate Formatted Text", "O", 1, None, None),
            ("ID", "Name Of Alternate Coding System", "O", 1, None, None),
            ("ST", "Coding System Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Original Text", "O", 1, None, None),
            ("ST", "Second Alternate Identifier", "O", 1, None, None),
            ("FT", "Second Alternate Formatted Text", "O", 1, None, None),
            ("ID", "Name Of Second Alternate Coding System", "O", 1, None, None),
            ("ST", "Second Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Coding System OID", "O", 1, None, None),
            ("ST", "Value Set OID", "O", 1, None, None),
            ("DTM", "Value Set Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Alternate Value Set Version ID", "O", 1, None, None),
            ("ST", "Second Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Second Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Second Alternate Value Set Version ID", "O", 1, None, None),
        ),
    ),
    "CNE": (
        "Coded with No Exceptions",
        (
            ("ST", "Identifier", "R", 1, None, None),
            ("ST", "Text", "O", 1, None, None),
            ("ID", "Name Of Coding System", "O", 1, None, None),
            ("ST", "Alternate Identifier", "O", 1, None, None),
            ("ST", "Alternate Text", "O", 1, None, None),
            ("ID", "Name Of Alternate Coding System", "O", 1, None, None),
            ("ST", "Coding System Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Original Text", "O", 1, None, None),
            ("ST", "Second Alternate Identifier", "O", 1, None, None),
            ("ST", "Second Alternate Text", "O", 1, None, None),
            ("ID", "Name Of Second Alternate Coding System", "O", 1, None, None),
            ("ST", "Second Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Coding System OID", "O", 1, None, None),
            ("ST", "Value Set OID", "O", 1, None, None),
            ("DTM", "Value Set Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Alternate Value Set Version ID", "O", 1, None, None),
            ("ST", "Second Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Second Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Second Alternate Value Set Version ID", "O", 1, None, None),
        ),
    ),
    "CNN": (
        "Composite ID Number and Name Simplified",
        (
            ("ST", "ID Number", "O", 1, None, None),
            ("ST", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            (
                "ST",
                "Second And Further Given Names Or Initials Thereof",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("IS", "Degree E G Md", "O", 1, None, None),
            ("IS", "Source Table", "O", 1, None, None),
            ("IS", "Assigning Authority Namespace ID", "O", 1, None, None),
            ("ST", "Assigning Authority Universal ID", "O", 1, None, None),
            ("ID", "Assigning Authority Universal ID Type", "O", 1, None, None),
        ),
    ),
    "CP": (
        "Composite Price",
        (
            ("MO", "Price", "R", 1, None, None),
            ("ID", "Price Type", "O", 1, None, None),
            ("NM", "From Value", "O", 1, None, None),
            ("NM", "To Value", "O", 1, None, None),
            ("CWE", "Range Units", "O", 1, None, None),
            ("ID", "Range Type", "O", 1, None, None),
        ),
    ),
    "CQ": (
        "Composite Quantity with Units",
        (("NM", "Quantity", "O", 1, None, None), ("CWE", "Units", "O", 1, None, None)),
    ),
    "CSU": (
        "Channel Sensitivity and Units",
        (
            ("NM", "Channel Sensitivity", "R", 1, None, None),
            ("ST", "Unit Of Measure Identifier", "O", 1, None, None),
            ("ST", "Unit Of Measure Description", "O", 1, None, None),
            ("ID", "Unit Of Measure Coding System", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Identifier", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Description", "O", 1, None, None),
            ("ID", "Alternate Unit Of Measure Coding System", "O", 1, None, None),
            ("ST", "Unit Of Measure Coding System Version ID", "O", 1, None, None),
            (
                "ST",
                "Alternate Unit Of Measure Coding System Version ID",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Original Text", "O", 1, None, None),
            ("ST", "Second Alternate Unit Of Measure Identifier", "O", 1, None, None),
            ("ST", "Second Alternate Unit Of Measure Text", "O", 1, None, None),
            (
                "ID",
                "Name Of Second Alternate Unit Of Measure Coding Sy",
                "O",
                1,
                None,
                None,
            ),
            (
                "ST",
                "Second Alternate Unit Of Measure Coding System Ver",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Unit Of Measure Coding System OID", "O", 1, None, None),
            ("ST", "Unit Of Measure Value Set OID", "O", 1, None, None),
            ("DTM", "Unit Of Measure Value Set Version ID", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Coding System OID", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Value Set OID", "O", 1, None, None),
            (
                "DTM",
                "Alternate Unit Of Measure Value Set Version ID",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Alternate Unit Of Measure Coding System OID", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Value Set OID", "O", 1, None, None),
            (
                "ST",
                "Alternate Unit Of Measure Value Set Version ID",
                "O",
                1,
                None,
                None,
            ),
        ),
    ),
    "CWE": (
        "Coded with Exceptions",
        (
            ("ST", "Identifier", "O", 1, 20, None),
            ("ST", "Text", "O", 1, 199, None),
            ("ID", "Name of Coding System", "O", 1, 20, "0396"),
            ("ST", "Alternate Identifier", "O", 1, 20, None),
            ("ST", "Alternate Text", "O", 1, 199, None),
            ("ID", "Name of Alternate Coding System", "O", 1, 20, "0396"),
            ("ST", "Coding System Version ID", "O", 1, 10, None),
            ("ST", "Alternate Coding System Version ID", "O", 1, 10, None),
            ("ST", "Original Text", "O", 1, 199, None),
            ("ST", "Second Alternate Identifier", "O", 1, None, None),
            ("ST", "Second Alternate Text", "O", 1, None, None),
            ("ID", "Name Of Second Alternate Coding System", "O", 1, None, None),
            ("ST", "Second Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Coding System OID", "O", 1, None, None),
            ("ST", "Value Set OID", "O", 1, None, None),
            ("DTM", "Value Set Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Alternate Value Set Version ID", "O", 1, None, None),
            ("ST", "Second Alternate Coding System OID", "O", 1, None, None),
            ("ST", "Second Alternate Value Set OID", "O", 1, None, None),
            ("DTM", "Second Alternate Value Set Version ID", "O", 1, None, None),
        ),
    ),
    "CX": (
        "Extended Composite ID with Check Digit",
        (
            ("ST", "ID Number", "R", 1, 15, None),
            ("ST", "Check Digit", "O", 1, 1, None),
            ("ID", "Check Digit Scheme", "O", 1, 3, "0061"),
            ("HD", "Assigning Authority", "O", 1, 227, "0363"),
            ("ID", "Identifier Type Code", "R", 1, 5, "0203"),
            ("HD", "Assigning Facility", "O", 1, 227, None),
            ("DT", "Effective Date", "O", 1, 8, None),
            ("DT", "Expiration Date", "O", 1, 8, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, 705, None),
            ("CWE", "Assigning Agency or Department", "O", 1, 705, None),
            ("ST", "Security Check", "O", 1, None, None),
            ("ID", "Security Check Scheme", "O", 1, None, None),
        ),
    ),
    "DDI": (
        "Daily Deductible Information",
        (
            ("NM", "Delay Days", "O", 1, None, None),
            ("MO", "Monetary Amount", "R", 1, None, None),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "DIN": (
        "Date and Institution Name",
        (
            ("DTM", "Date", "R", 1, None, None),
            ("CWE", "Institution Name", "R", 1, None, None),
        ),
    ),
    "DLD": (
        "Discharge to Location and Date",
        (
            ("CWE", "Discharge To Location", "R", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
        ),
    ),
    "DLN": (
        "Driver's License Number",
        (
            ("ST", "License Number", "R", 1, None, None),
            ("CWE", "Issuing State Province Country", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "DLT": (
        "Delta",
        (
            ("NR", "Normal Range", "O", 1, None, None),
            ("NM", "Numeric Threshold", "O", 1, None, None),
            ("ID", "Change Computation", "O", 1, None, None),
            ("NM", "Days Retained", "O", 1, None, None),
        ),
    ),
    "DR": (
        "Date/Time Range",
        (
            ("DTM", "Range Start Date Time", "O", 1, None, None),
            ("DTM", "Range End Date Time", "O", 1, None, None),
        ),
    ),
    "DTN": (
        "Day Type and Number",
        (
            ("CWE", "Day Type", "R", 1, None, None),
            ("NM", "Number Of Days", "R", 1, None, None),
        ),
    ),
    "ED": (
        "Encapsulated Data",
        (
            ("HD", "Source Application", "O", 1, None, None),
            ("ID", "Type Of Data", "R", 1, None, None),
            ("ID", "Data Subtype", "O", 1, None, None),
            ("ID", "Encoding", "R", 1, None, None),
            ("TX", "Data", "R", 1, None, None),
        ),
    ),
    "EI": (
        "Entity Identifier",
        (
            ("ST", "Entity Identifier", "O", 1, 199, None),
            ("IS", "Namespace ID", "O", 1, 20, "0363"),
            ("ST", "Universal ID", "O", 1, 199, None),
            ("ID", "Universal ID Type", "O", 1, 6, "0301"),
        ),
    ),
    "EIP": (
        "Entity Identifier Pair",
        (
            ("EI", "Placer Assigned Identifier", "O", 1, None, None),
            ("EI", "Filler Assigned Identifier", "O", 1, None, None),
        ),
    ),
    "ERL": (
        "Error Location",
        (
            ("ST", "Segment ID", "R", 1, None, None),
            ("NM", "Segment Sequence", "R", 1, None, None),
            ("NM", "Field Position", "O", 1, None, None),
            ("NM", "Field Repetition", "O", 1, None, None),
            ("NM", "Component Number", "O", 1, None, None),
            ("NM", "Sub Component Number", "O", 1, None, None),
        ),
    ),
    "FC": (
        "Financial Class",
        (
            ("CWE", "Financial Class Code", "R", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
        ),
    ),
    "FN": (
        "Family Name",
        (
            ("ST", "Surname", "R", 1, None, None),
            ("ST", "Own Surname Prefix", "O", 1, None, None),
            ("ST", "Own Surname", "O", 1, None, None),
            ("ST", "Surname Prefix From Partner Spouse", "O", 1, None, None),
            ("ST", "Surname From Partner Spouse", "O", 1, None, None),
        ),
    ),
    "HD": (
        "Hierarchic Designator",
        (
            ("IS", "Namespace ID", "O", 1, 20, "0300"),
            ("ST", "Universal ID", "O", 1, 199, None),
            ("ID", "Universal ID Type", "O", 1, 6, "0301"),
        ),
    ),
    "ICD": (
        "Insurance Certification Definition",
        (
            ("CWE", "Certification Patient Type", "O", 1, None, None),
            ("ID", "Certification Required", "R", 1, None, None),
            ("DTM", "Date Time Certification Required", "O", 1, None, None),
        ),
    ),
    "JCC": (
        "Job Code/Class",
        (
            ("CWE", "Job Code", "O", 1, None, None),
            ("CWE", "Job Class", "O", 1, None, None),
            ("TX", "Job Description Text", "O", 1, None, None),
        ),
    ),
    "LA1": (
        "Location with Address Variation 1",
        (
            ("IS", "Point Of Care", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Patient Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("IS", "Floor", "O", 1, None, None),
            ("AD", "Address", "O", 1, None, None),
        ),
    ),
    "LA2": (
        "Location with Address Variation 2",
        (
            ("IS", "Point Of Care", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Patient Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("IS", "Floor", "O", 1, None, None),
            ("ST", "Street Address", "O", 1, None, None),
            ("ST", "Other Designation", "O", 1, None, None),
            ("ST", "City", "O", 1, None, None),
            ("ST", "State Or Province", "O", 1, None, None),
            ("ST", "Zip Or Postal Code", "O", 1, None, None),
            ("ID", "Country", "O", 1, None, None),
            ("ID", "Address Type", "O", 1, None, None),
            ("ST", "Other Geographic Designation", "O", 1, None, None),
        ),
    ),
    "MA": (
        "Multiplexed Array",
        (
            ("NM", "Sample Y From Channel 1", "O", 1, None, None),
            ("NM", "Sample Y From Channel 2", "O", 1, None, None),
            ("NM", "Sample Y From Channel 3", "O", 1, None, None),
            ("NM", "Sample Y From Channel 4", "O", 1, None, None),
        ),
    ),
    "MO": (
        "Money",
        (
            ("NM", "Quantity", "O", 1, None, None),
            ("ID", "Denomination", "O", 1, None, None),
        ),
    ),
    "MOC": (
        "Money and Code",
        (
            ("MO", "Monetary Amount", "O", 1, None, None),
            ("CWE", "Charge Code", "O", 1, None, None),
        ),
    ),
    "MOP": (
        "Money or Percentage",
        (
            ("ID", "Money Or Percentage Indicator", "R", 1, None, None),
            ("NM", "Money Or Percentage Quantity", "R", 1, None, None),
            ("ID", "Monetary Denomination", "O", 1, None, None),
        ),
    ),
    "MSG": (
        "Message Type",
        (
            ("ID", "Message Code", "R", 1, 3, "0076"),
            ("ID", "Trigger Event", "R", 1, 3, "0003"),
            ("ID", "Message Structure", "R", 1, 7, "0354"),
        ),
    ),
    "NA": (
        "Numeric Array",
        (
            ("NM", "VALUE1", "O", 1, None, None),
            ("NM", "VALUE2", "O", 1, None, None),
            ("NM", "VALUE3", "O", 1, None, None),
            ("NM", "VALUE4", "O", 1, None, None),
        ),
    ),
    "NDL": (
        "Name with Date and Location",
        (
            ("CNN", "Name", "O", 1, None, None),
            ("DTM", "Start Date Time", "O", 1, None, None),
            ("DTM", "End Date Time", "O", 1, None, None),
            ("IS", "Point Of Care", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Patient Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("IS", "Floor", "O", 1, None, None),
        ),
    ),
    "NR": (
        "Numeric Range",
        (
            ("NM", "Low Value", "O", 1, None, None),
            ("NM", "High Value", "O", 1, None, None),
        ),
    ),
    "OCD": (
        "Occurrence Code and Date",
        (
            ("CNE", "Occurrence Code", "R", 1, None, None),
            ("DT", "Occurrence Date", "R", 1, None, None),
        ),
    ),
    "OSP": (
        "Occurrence Span Code and Date",
        (
            ("CNE", "Occurrence Span Code", "R", 1, None, None),
            ("DT", "Occurrence Span Start Date", "O", 1, None, None),
            ("DT", "Occurrence Span Stop Date", "O", 1, None, None),
        ),
    ),
    "PIP": (
        "Practitioner Institutional Privileges",
        (
            ("CWE", "Privilege", "R", 1, None, None),
            ("CWE", "Privilege Class", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
            ("DT", "Activation Date", "O", 1, None, None),
            ("EI", "Facility", "O", 1, None, None),
        ),
    ),
    "PL": (
        "Person Location",
        (
            ("HD", "Point Of Care", "O", 1, None, None),
            ("HD", "Room", "O", 1, None, None),
            ("HD", "Bed", "O", 1, None, None),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Person Location Type", "O", 1, None, None),
            ("HD", "Building", "O", 1, None, None),
            ("HD", "Floor", "O", 1, None, None),
            ("ST", "Location Description", "O", 1, None, None),
            ("EI", "Comprehensive Location Identifier", "O", 1, None, None),
            ("HD", "Assigning Authority For Location", "O", 1, None, None),
        ),
    ),
    "PLN": (
        "Practitioner License or Other ID Number",
        (
            ("ST", "ID Number", "R", 1, None, None),
            ("CWE", "Type Of ID Number", "R", 1, None, None),
            ("ST", "State Other Qualifying Information", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "PPN": (
        "Performing Person Time Stamp",
        (
            ("ST", "Person Identifier", "O", 1, None, None),
            ("FN", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            (
                "ST",
                "Second And Further Given Names Or Initials Thereof",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("WD", "Degree E G Md", "B", 1, None, None),
            ("CWE", "Source Table", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("ID", "Name Type Code", "O", 1, None, None),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("ID", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("DTM", "Date Time Action Performed", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, None),
            ("CWE", "Name Context", "O", 1, None, None),
            ("WD", "Name Validity Range", "B", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("ST", "Professional Suffix", "O", 1, None, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, None, None),
            ("CWE", "Assigning Agency Or Department", "O", 1, None, None),
            ("ST", "Security Check", "O", 1, None, None),
            ("ID", "Security Check Scheme", "O", 1, None, None),
        ),
    ),
    "PRL": (
        "Parent Result Link",
        (
            ("CWE", "Parent Observation Identifier", "R", 1, None, None),
            ("ST", "Parent Observation Sub Identifier", "O", 1, None, None),
            ("TX", "Parent Observation Value Descriptor", "O", 1, None, None),
        ),
    ),
    "PT": (
        "Processing Type",
        (
            ("ID", "Processing ID", "R", 1, 1, "0103"),
            ("ID", "Processing Mode", "O", 1, 1, "0207"),
        ),
    ),
    "PTA": (
        "Policy Type and Amount",
        (
            ("CWE", "Policy Type", "R", 1, None, None),
            ("CWE", "Amount Class", "O", 1, None, None),
            ("WD", "Money Or Percentage Quantity", "B", 1, None, None),
            ("MOP", "Money Or Percentage", "R", 1, None, None),
        ),
    ),
    "QIP": (
        "Query Input Parameter List",
        (
            ("ST", "Segment Field Name", "R", 1, None, None),
            ("ST", "Values", "R", 1, None, None),
        ),
    ),
    "QSC": (
        "Query Selection Criteria",
        (
            ("ST", "Segment Field Name", "R", 1, None, None),
            ("ID", "Relational Operator", "O", 1, None, None),
            ("ST", "Value", "O", 1, None, None),
            ("ID", "Relational Conjunction", "O", 1, None, None),
        ),
    ),
    "RCD": (
        "Row Column Definition",
        (
            ("ST", "Segment Field Name", "O", 1, None, None),
            ("ID", "HL7 Data Type", "O", 1, None, None),
            ("NM", "Maximum Column Width", "O", 1, None, None),
        ),
    ),
    "RFR": (
        "Reference Range",
        (
            ("NR", "Numeric Range", "R", 1, None, None),
            ("CWE", "Administrative Sex", "O", 1, None, None),
            ("NR", "Age Range", "O", 1, None, None),
            ("NR", "Gestational Age Range", "O", 1, None, None),
            ("ST", "Species", "O", 1, None, None),
            ("ST", "Race Subspecies", "O", 1, None, None),
            ("TX", "Conditions", "O", 1, None, None),
        ),
    ),
    "RI": (
        "Repeat Interval",
        (
            ("CWE", "Repeat Pattern", "O", 1, None, None),
            ("ST", "Explicit Time Interval", "O", 1, None, None),
        ),
    ),
    "RMC": (
        "Room Coverage",
        (
            ("CWE", "Room Type", "R", 1, None, None),
            ("CWE", "Amount Type", "O", 1, None, None),
            ("WD", "Coverage Amount", "B", 1, None, None),
            ("MOP", "Money Or Percentage", "R", 1, None, None),
        ),
    ),
    "RP": (
        "Reference Pointer",
        (
            ("ST", "Pointer", "O", 1, None, None),
            ("HD", "Application ID", "O", 1, None, None),
            ("ID", "Type Of Data", "O", 1, None, None),
            ("ID", "Subtype", "O", 1, None, None),
        ),
    ),
    "RPT": (
        "Repeat Pattern",
        (
            ("CWE", "Repeat Pattern Code", "R", 1, None, None),
            ("ID", "Calendar Alignment", "O", 1, None, None),
            ("NM", "Phase Range Begin Value", "O", 1, None, None),
            ("NM", "Phase Range End Value", "O", 1, None, None),
            ("NM", "Period Quantity", "O", 1, None, None),
            ("CWE", "Period Units", "O", 1, None, None),
            ("ID", "Institution Specified Time", "O", 1, None, None),
            ("ID", "Event", "O", 1, None, None),
            ("NM", "Event Offset Quantity", "O", 1, None, None),
            ("CWE", "Event Offset Units", "O", 1, None, None),
            ("GTS", "General Timing Specification", "O", 1, None, None),
        ),
    ),
    "SAD": (
        "Street Address",
        (
            ("ST", "Street Or Mailing Address", "O", 1, None, None),
            ("ST", "Street Name", "O", 1, None, None),
            ("ST", "Dwelling Number", "O", 1, None, None),
        ),
    ),
    "SCV": (
        "Scheduling Class Value Pair",
        (
            ("CWE", "Parameter Class", "O", 1, None, None),
            ("ST", "Parameter Value", "O", 1, None, None),
        ),
    ),
    "SN": (
        "Structured Numeric",
        (
            ("ST", "Comparator", "O", 1, None, None),
            ("NM", "NUM1", "O", 1, None, None),
            ("ST", "Separator Suffix", "O", 1, None, None),
            ("NM", "NUM2", "O", 1, None, None),
        ),
    ),
    "SPD": (
        "Specialty Description",
        (
            ("ST", "Specialty Name", "R", 1, None, None),
            ("ST", "Governing Board", "O", 1, None, None),
            ("ID", "Eligible Or Certified", "O", 1, None, None),
            ("DT", "Date Of Certification", "O", 1, None, None),
        ),
    ),
    "SRT": (
        "Sort Order",
        (
            ("ST", "Sort By Field", "R", 1, None, None),
            ("ID", "Sequencing", "O", 1, None, None),
        ),
    ),
    "UVC": (
        "UB Value Code and Amount",
        (
            ("CWE", "Value Code", "R", 1, None, None),
            ("MO", "Value Amount", "O", 1, None, None),
            ("NM", "Non Monetary Value Amount Quantity", "O", 1, None, None),
            ("CWE", "Non Monetary Value Amount Units", "O", 1, None, None),
        ),
    ),
    "VH": (
        "Visiting Hours",
        (
            ("ID", "Start Day Range", "O", 1, None, None),
            ("ID", "End Day Range", "O", 1, None, None),
            ("TM", "Start Hour Range", "O", 1, None, None),
            ("TM", "End Hour Range", "O", 1, None, None),
        ),
    ),
    "VID": (
        "Version Identifier",
        (
            ("ID", "Version ID", "R", 1, 5, "0104"),
            ("CWE", "Internationalization Code", "O", 1, 705, "0399"),
            ("CWE", "International Version ID", "O", 1, 705, None),
        ),
    ),
    "VR": (
        "Value Range",
        (
            ("ST", "First Data Code Value", "O", 1, None, None),
            ("ST", "Last Data Code Value", "O", 1, None, None),
        ),
    ),
    "WVI": (
        "Channel Identifier",
        (
            ("NM", "Channel Number", "R", 1, None, None),
            ("ST", "Channel Name", "O", 1, None, None),
        ),
    ),
    "WVS": (
        "Waveform Source",
        (
            ("ST", "Source One Name", "R", 1, None, None),
            ("ST", "Source Two Name", "O", 1, None, None),
        ),
    ),
    "XAD": (
        "Extended Address",
        (
            ("SAD", "Street Address", "O", 1, None, None),
            ("ST", "Other Designation", "O", 1, None, None),
            ("ST", "City", "O", 1, None, None),
            ("ST", "State Or Province", "O", 1, None, None),
            ("ST", "Zip Or Postal Code", "O", 1, None, None),
            ("ID", "Country", "O", 1, None, None),
            ("ID", "Address Type", "O", 1, None, None),
            ("ST", "Other Geographic Designation", "O", 1, None, None),
            ("CWE", "County Parish Code", "O", 1, None, None),
            ("CWE", "Census Tract", "O", 1, None, None),
            ("ID", "Address Representation Code", "O", 1, None, None),
            ("WD", "Address Validity Range", "B", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("CWE", "Expiration Reason", "O", 1, None, None),
            ("ID", "Temporary Indicator", "O", 1, None, None),
            ("ID", "Bad Address Indicator", "O", 1, None, None),
            ("ID", "Address Usage", "O", 1, None, None),
            ("ST", "Addressee", "O", 1, None, None),
            ("ST", "Comment", "O", 1, None, None),
            ("NM", "Preference Order", "O", 1, None, None),
            ("CWE", "Protection Code", "O", 1, None, None),
            ("EI", "Address Identifier", "O", 1, None, None),
        ),
    ),
    "XCN": (
        "Extended Composite ID Number and Name for Persons",
        (
            ("ST", "Person Identifier", "O", 1, None, None),
            ("FN", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            (
                "ST",
                "Second And Further Given Names Or Initials Thereof",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("WD", "Degree E G Md", "B", 1, None, None),
            ("CWE", "Source Table", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("ID", "Name Type Code", "O", 1, None, None),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("ID", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, None),
            ("CWE", "Name Context", "O", 1, None, None),
            ("WD", "Name Validity Range", "B", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("ST", "Professional Suffix", "O", 1, None, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, None, None),
            ("CWE", "Assigning Agency Or Department", "O", 1, None, None),
            ("ST", "Security Check", "O", 1, None, None),
            ("ID", "Security Check Scheme", "O", 1, None, None),
        ),
    ),
    "XON": (
        "Extended Composite Name and Identification Number for Organizations",
        (
            ("ST", "Organization Name", "O", 1, None, None),
            ("CWE", "Organization Name Type Code", "O", 1, None, None),
            ("WD", "ID Number", "B", 1, None, None),
            ("NM", "Identifier Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("ID", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, None),
            ("ST", "Organization Identifier", "O", 1, None, None),
        ),
    ),
    "XPN": (
        "Extended Person Name",
        (
            ("FN", "Family Name", "O", 1, 194, None),
            ("ST", "Given Name", "O", 1, 30, None),
            (
                "ST",
                "Second and Further Given Names or Initials Thereof",
                "O",
                1,
                30,
                None,
            ),
            ("ST", "Suffix", "O", 1, 20, None),
            ("ST", "Prefix", "O", 1, 20, None),
            ("ST", "Degree", "B", 1, None, None),
            ("ID", "Name Type Code", "O", 1, 1, "0200"),
            ("ID", "Name Representation Code", "O", 1, 1, "0465"),
            ("CWE", "Name Context", "O", 1, 705, "0448"),
            ("ST", "Name Validity Range", "B", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, 1, "0444"),
            ("DTM", "Effective Date", "O", 1, 24, None),
            ("DTM", "Expiration Date", "O", 1, 24, None),
            ("ST", "Professional Suffix", "O", 1, 199, None),
            ("ST", "Called By", "O", 1, None, None),
        ),
    ),
    "XTN": (
        "Extended Telecommunication Number",
        (
            ("WD", "Telephone Number", "B", 1, None, None),
            ("ID", "Telecommunication Use Code", "O", 1, None, None),
            ("ID", "Telecommunication Equipment Type", "R", 1, None, None),
            ("ST", "Communication Address", "O", 1, None, None),
            ("SNM", "Country Code", "O", 1, None, None),
            ("SNM", "Area City Code", "O", 1, None, None),
            ("SNM", "Local Number", "O", 1, None, None),
            ("SNM", "Extension", "O", 1, None, None),
            ("ST", "Any Text", "O", 1, None, None),
            ("ST", "Extension Prefix", "O", 1, None, None),
            ("ST", "Speed Dial Code", "O", 1, None, None),
            ("ST", "Unformatted Telephone Number", "O", 1, None, None),
            ("DTM", "Effective Start Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("CWE", "Expiration Reason", "O", 1, None, None),
            ("CWE", "Protection Code", "O", 1, None, None),
            ("EI", "Shared Telecommunication Identifier", "O", 1, None, None),
            ("NM", "Preference Order", "O", 1, None, None),
        ),
    ),
}
