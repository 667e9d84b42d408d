# src/hl7_definitions/data/v2_5_1/datatypes.py
"""HL7 v2.5.1 composite data types."""

DATATYPES = {
    "AD": (
        "Address",
        (
            ("ST", "Street Address", "R", 1, 120, None),
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
            ("ID", "Invocation Event", "O", 1, None, "0100"),
            ("TS", "Date Time", "O", 1, None, None),
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
            ("CSU", "Channel Sensitivity Units", "O", 1, None, None),
            ("CCP", "Channel Calibration Parameters", "O", 1, None, None),
            ("NM", "Channel Sampling Frequency", "O", 1, None, None),
            ("NR", "Minimum Maximum Data Values", "O", 1, None, None),
        ),
    ),
    "CE": (
        "Coded Element",
        (
            ("ST", "Identifier", "O", 1, 20, None),
            ("ST", "Text", "O", 1, 199, None),
            ("ID", "Name of Coding System", "O", 1, 20, "0396"),
            ("ST", "Alternate Identifier", "O", 1, 20, None),
            ("ST", "Alternate Text", "O", 1, 199, None),
            ("ID", "Name of Alternate Coding System", "O", 1, 20, "0396"),
        ),
    ),
    "CF": (
        "Coded Element with Formatted Values",
        (
            ("ST", "Identifier", "O", 1, None, None),
            ("FT", "Formatted Text", "O", 1, None, None),
            ("ID", "Name Of Coding System", "O", 1, None, "0396"),
            ("ST", "Alternate Identifier", "O", 1, None, None),
            ("FT", "Alternate Formatted Text", "O", 1, None, None),
            ("ID", "Name Of Alternate Coding System", "O", 1, None, "0396"),
        ),
    ),
    "CNE": (
        "Coded with No Exceptions",
        (
            ("ST", "Identifier", "O", 1, None, None),
            ("ST", "Text", "O", 1, None, None),
            ("ID", "Name Of Coding System", "O", 1, None, "0396"),
            ("ST", "Alternate Identifier", "O", 1, None, None),
            ("ST", "Alternate Text", "O", 1, None, None),
            ("ID", "Name Of Alternate Coding System", "O", 1, None, "0396"),
            ("ST", "Coding System Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Original Text", "O", 1, None, None),
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
            ("IS", "Degree E G Md", "O", 1, None, "0360"),
            ("IS", "Source Table", "O", 1, None, "0297"),
            ("IS", "Assigning Authority Namespace ID", "O", 1, None, "0363"),
            ("ST", "Assigning Authority Universal ID", "O", 1, None, None),
            ("ID", "Assigning Authority Universal ID Type", "O", 1, None, "0301"),
        ),
    ),
    "CP": (
        "Composite Price",
        (
            ("MO", "Price", "O", 1, None, None),
            ("ID", "Price Type", "O", 1, None, "0205"),
            ("NM", "From Value", "O", 1, None, None),
            ("NM", "To Value", "O", 1, None, None),
            ("CE", "Range Units", "O", 1, None, None),
            ("ID", "Range Type", "O", 1, None, "0298"),
        ),
    ),
    "CQ": (
        "Composite Quantity with Units",
        (("NM", "Quantity", "O", 1, None, None), ("CE", "Units", "O", 1, None, None)),
    ),
    "CQ_SIMPLE": (
        "Composite Quantity with Units",
        (("NM", "Quantity", "O", 1, None, None), ("ST", "Units", "O", 1, None, None)),
    ),
    "CSU": (
        "Channel Sensitivity and Units",
        (
            ("NM", "Channel Sensitivity", "O", 1, None, None),
            ("ST", "Unit Of Measure Identifier", "O", 1, None, None),
            ("ST", "Unit Of Measure Description", "O", 1, None, None),
            ("ID", "Unit Of Measure Coding System", "O", 1, None, "0396"),
            ("ST", "Alternate Unit Of Measure Identifier", "O", 1, None, None),
            ("ST", "Alternate Unit Of Measure Description", "O", 1, None, None),
            ("ID", "Alternate Unit Of Measure Coding System", "O", 1, None, "0396"),
        ),
    ),
    "CWE": (
        "Coded with Exceptions",
        (
            ("ST", "Identifier", "O", 1, None, None),
            ("ST", "Text", "O", 1, None, None),
            ("ID", "Name Of Coding System", "O", 1, None, "0396"),
            ("ST", "Alternate Identifier", "O", 1, None, None),
            ("ST", "Alternate Text", "O", 1, None, None),
            ("ID", "Name Of Alternate Coding System", "O", 1, None, "0396"),
            ("ST", "Coding System Version ID", "O", 1, None, None),
            ("ST", "Alternate Coding System Version ID", "O", 1, None, None),
            ("ST", "Original Text", "O", 1, None, None),
        ),
    ),
    "CX": (
        "Extended Composite ID with Check Digit",
        (
            ("ST", "ID Number", "O", 1, 15, None),
            ("ST", "Check Digit", "O", 1, 1, None),
            ("ID", "Check Digit Scheme", "O", 1, 3, "0061"),
            ("HD", "Assigning Authority", "O", 1, 227, "0363"),
            ("ID", "Identifier Type Code", "O", 1, 5, "0203"),
            ("HD", "Assigning Facility", "O", 1, 227, None),
            ("DT", "Effective Date", "O", 1, 8, None),
            ("DT", "Expiration Date", "O", 1, 8, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, 705, None),
            ("CWE", "Assigning Agency or Department", "O", 1, 705, None),
        ),
    ),
    "DDI": (
        "Daily Deductible Information",
        (
            ("NM", "Delay Days", "O", 1, None, None),
            ("MO", "Monetary Amount", "O", 1, None, None),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "DIN": (
        "Date and Institution Name",
        (
            ("TS", "Date", "O", 1, None, None),
            ("CE", "Institution Name", "O", 1, None, "0531"),
        ),
    ),
    "DLD": (
        "Discharge to Location and Date",
        (
            ("IS", "Discharge Location", "O", 1, None, "0113"),
            ("TS", "Effective Date", "O", 1, None, None),
        ),
    ),
    "DLN": (
        "Driver's License Number",
        (
            ("ST", "License Number", "O", 1, None, None),
            ("IS", "Issuing State Province Country", "O", 1, None, "0333"),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "DLT": (
        "Delta",
        (
            ("NR", "Normal Range", "O", 1, None, None),
            ("NM", "Numeric Threshold", "O", 1, None, None),
            ("ID", "Change Computation", "O", 1, None, "0523"),
            ("NM", "Days Retained", "O", 1, None, None),
        ),
    ),
    "DR": (
        "Date/Time Range",
        (
            ("TS", "Range Start Date Time", "O", 1, None, None),
            ("TS", "Range End Date Time", "O", 1, None, None),
        ),
    ),
    "DR_SIMPLE": (
        "Date/Time Range",
        (
            ("ST", "Range Start Date Time", "O", 1, None, None),
            ("ST", "Range End Date Time", "O", 1, None, None),
        ),
    ),
    "DTN": (
        "Day Type and Number",
        (
            ("IS", "Day Type", "O", 1, None, "0149"),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "ED": (
        "Encapsulated Data",
        (
            ("HD", "Source Application", "O", 1, None, None),
            ("ID", "Type Of Data", "O", 1, None, "0191"),
            ("ID", "Data Subtype", "O", 1, None, "0291"),
            ("ID", "Encoding", "O", 1, None, "0299"),
            ("TX", "Data", "O", 1, None, None),
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
    "ELD": (
        "Error Location and Description",
        (
            ("ST", "Segment ID", "O", 1, None, None),
            ("NM", "Segment Sequence", "O", 1, None, None),
            ("NM", "Field Position", "O", 1, None, None),
            ("CE", "Code Identifying Error", "O", 1, None, "0357"),
        ),
    ),
    "ERL": (
        "Error Location",
        (
            ("ST", "Segment ID", "O", 1, None, None),
            ("NM", "Segment Sequence", "O", 1, None, None),
            ("NM", "Field Position", "O", 1, None, None),
            ("NM", "Field Repetition", "O", 1, None, None),
            ("NM", "Component Number", "O", 1, None, None),
            ("NM", "Sub Component Number", "O", 1, None, None),
        ),
    ),
    "FC": (
        "Financial Class",
        (
            ("IS", "Financial Class Code", "O", 1, None, "0064"),
            ("TS", "Effective Date", "O", 1, None, None),
        ),
    ),
    "FN": (
        "Family Name",
        (
            ("ST", "Surname", "O", 1, None, None),
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
            ("IS", "Certification Patient Type", "O", 1, None, "0150"),
            ("ID", "Certification Required", "O", 1, None, "0136"),
            ("TS", "Date Time Certification Required", "O", 1, None, None),
        ),
    ),
    "JCC": (
        "Job Code/Class",
        (
            ("IS", "Job Code", "O", 1, None, "0327"),
            ("IS", "Job Class", "O", 1, None, "0328"),
            ("TX", "Job Description Text", "O", 1, None, None),
        ),
    ),
    "LA1": (
        "Location with Address Variation 1",
        (
            ("IS", "Point Of Care", "O", 1, None, "0302"),
            ("IS", "Room", "O", 1, None, "0303"),
            ("IS", "Bed", "O", 1, None, "0304"),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, "0306"),
            ("IS", "Patient Location Type", "O", 1, None, "0305"),
            ("IS", "Building", "O", 1, None, "0307"),
            ("IS", "Floor", "O", 1, None, "0308"),
            ("AD", "Address", "O", 1, None, None),
        ),
    ),
    "LA2": (
        "Location with Address Variation 2",
        (
            ("IS", "Point Of Care", "O", 1, None, "0302"),
            ("IS", "Room", "O", 1, None, "0303"),
            ("IS", "Bed", "O", 1, None, "0304"),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, "0306"),
            ("IS", "Patient Location Type", "O", 1, None, "0305"),
            ("IS", "Building", "O", 1, None, "0307"),
            ("IS", "Floor", "O", 1, None, "0308"),
            ("ST", "Street Address", "O", 1, None, None),
            ("ST", "Other Designation", "O", 1, None, None),
            ("ST", "City", "O", 1, None, None),
            ("ST", "State Or Province", "O", 1, None, None),
            ("ST", "Zip Or Postal Code", "O", 1, None, None),
            ("ID", "Country", "O", 1, None, "0399"),
            ("ID", "Address Type", "O", 1, None, "0190"),
            ("ST", "Other Geographic Designation", "O", 1, None, None),
        ),
    ),
    "MA": (
        "Multiplexed Array",
        (
            ("NM", "Sample 1 From Channel 1", "O", 1, None, None),
            ("NM", "Sample 1 From Channel 2", "O", 1, None, None),
            ("NM", "Sample 1 From Channel N", "O", 1, None, None),
            ("NM", "Sample 2 From Channel 1", "O", 1, None, None),
            ("NM", "Sample 2 From Channel N", "O", 1, None, None),
            ("NM", "Sample N From Channel N", "O", 1, None, None),
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
            ("CE", "Charge Code", "O", 1, None, None),
        ),
    ),
    "MOP": (
        "Money or Percentage",
        (
            ("ID", "Money Or Percentage Indicator", "O", 1, None, "0148"),
            ("NM", "Money Or Percentage Quantity", "O", 1, None, None),
            ("ID", "Currency Denomination", "O", 1, None, None),
        ),
    ),
    "MSG": (
        "Message Type",
        (
            ("ID", "Message Code", "O", 1, 3, "0076"),
            ("ID", "Trigger Event", "O", 1, 3, "0003"),
            ("ID", "Message Structure", "O", 1, 7, "0354"),
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
            ("TS", "Start Date Time", "O", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("IS", "Point Of Care", "O", 1, None, "0302"),
            ("IS", "Room", "O", 1, None, "0303"),
            ("IS", "Bed", "O", 1, None, "0304"),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, "0306"),
            ("IS", "Patient Location Type", "O", 1, None, "0305"),
            ("IS", "Building", "O", 1, None, "0307"),
            ("IS", "Floor", "O", 1, None, "0308"),
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
            ("CNE", "Occurrence Code", "O", 1, None, "0350"),
            ("DT", "Occurrence Date", "O", 1, None, None),
        ),
    ),
    "OSD": (
        "Order Sequence Definition",
        (
            ("ID", "Sequence Results Flag", "O", 1, None, "0524"),
            ("ST", "Placer Order Number Entity Identifier", "O", 1, None, None),
            ("IS", "Placer Order Number Namespace ID", "O", 1, None, "0363"),
            ("ST", "Filler Order Number Entity Identifier", "O", 1, None, None),
            ("IS", "Filler Order Number Namespace ID", "O", 1, None, "0363"),
            ("ST", "Sequence Condition Value", "O", 1, None, None),
            ("NM", "Maximum Number Of Repeats", "O", 1, None, None),
            ("ST", "Placer Order Number Universal ID", "O", 1, None, None),
            ("ID", "Placer Order Number Universal ID Type", "O", 1, None, "0301"),
            ("ST", "Filler Order Number Universal ID", "O", 1, None, None),
            ("ID", "Filler Order Number Universal ID Type", "O", 1, None, "0301"),
        ),
    ),
    "OSP": (
        "Occurrence Span Code and Date",
        (
            ("CNE", "Occurrence Span Code", "O", 1, None, "0351"),
            ("DT", "Occurrence Span Start Date", "O", 1, None, None),
            ("DT", "Occurrence Span Stop Date", "O", 1, None, None),
        ),
    ),
    "PIP": (
        "Practitioner Institutional Privileges",
        (
            ("CE", "Privilege", "O", 1, None, "0525"),
            ("CE", "Privilege Class", "O", 1, None, "0526"),
            ("DT", "Expiration Date", "O", 1, None, None),
            ("DT", "Activation Date", "O", 1, None, None),
            ("EI", "Facility", "O", 1, None, None),
        ),
    ),
    "PL": (
        "Person Location",
        (
            ("IS", "Point Of Care", "O", 1, None, "0302"),
            ("IS", "Room", "O", 1, None, "0303"),
            ("IS", "Bed", "O", 1, None, "0304"),
            ("HD", "Facility", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, "0306"),
            ("IS", "Person Location Type", "O", 1, None, "0305"),
            ("IS", "Building", "O", 1, None, "0307"),
            ("IS", "Floor", "O", 1, None, "0308"),
            ("ST", "Location Description", "O", 1, None, None),
            ("EI", "Comprehensive Location Identifier", "O", 1, None, None),
            ("HD", "Assigning Authority For Location", "O", 1, None, None),
        ),
    ),
    "PLN": (
        "Practitioner License or Other ID Number",
        (
            ("ST", "ID Number", "O", 1, None, None),
            ("IS", "Type Of ID Number", "O", 1, None, "0338"),
            ("ST", "State Other Qualifying Information", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "PPN": (
        "Performing Person Time Stamp",
        (
            ("ST", "ID Number", "O", 1, None, None),
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
            ("IS", "Degree E G Md", "O", 1, None, "0360"),
            ("IS", "Source Table", "O", 1, None, "0297"),
            ("HD", "Assigning Authority", "O", 1, None, "0363"),
            ("ID", "Name Type Code", "O", 1, None, "0200"),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, "0061"),
            ("ID", "Identifier Type Code", "O", 1, None, "0203"),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("TS", "Date Time Action Performed", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, "0465"),
            ("CE", "Name Context", "O", 1, None, "0448"),
            ("DR_SIMPLE", "Name Validity Range", "O", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, None, "0444"),
            ("TS", "Effective Date", "O", 1, None, None),
            ("TS", "Expiration Date", "O", 1, None, None),
            ("ST", "Professional Suffix", "O", 1, None, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, None, None),
            ("CWE", "Assigning Agency Or Department", "O", 1, None, None),
        ),
    ),
    "PRL": (
        "Parent Result Link",
        (
            ("CE", "Parent Observation Identifier", "O", 1, None, None),
            ("ST", "Parent Observation Sub Identifier", "O", 1, None, None),
            ("TX", "Parent Observation Value Descriptor", "O", 1, None, None),
        ),
    ),
    "PT": (
        "Processing Type",
        (
            ("ID", "Processing ID", "O", 1, 1, "0103"),
            ("ID", "Processing Mode", "O", 1, 1, "0207"),
        ),
    ),
    "PTA": (
        "Policy Type and Amount",
        (
            ("IS", "Policy Type", "O", 1, None, "0147"),
            ("IS", "Amount Class", "O", 1, None, "0193"),
            ("NM", "Money Or Percentage Quantity", "O", 1, None, None),
            ("MOP", "Money Or Percentage", "O", 1, None, None),
        ),
    ),
    "QIP": (
        "Query Input Parameter List",
        (
            ("ST", "Segment Field Name", "O", 1, None, None),
            ("ST", "Values", "O", 1, None, None),
        ),
    ),
    "QSC": (
        "Query Selection Criteria",
        (
            ("ST", "Segment Field Name", "O", 1, None, None),
            ("ID", "Relational Operator", "O", 1, None, "0209"),
            ("ST", "Value", "O", 1, None, None),
            ("ID", "Relational Conjunction", "O", 1, None, "0210"),
        ),
    ),
    "RCD": (
        "Row Column Definition",
        (
            ("ST", "Segment Field Name", "O", 1, None, None),
            ("ID", "HL7 Data Type", "O", 1, None, "0440"),
            ("NM", "Maximum Column Width", "O", 1, None, None),
        ),
    ),
    "RFR": (
        "Reference Range",
        (
            ("NR", "Numeric Range", "O", 1, None, None),
            ("IS", "Administrative Sex", "O", 1, None, "0001"),
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
            ("IS", "Repeat Pattern", "O", 1, None, "0335"),
            ("ST", "Explicit Time Interval", "O", 1, None, None),
        ),
    ),
    "RMC": (
        "Room Coverage",
        (
            ("IS", "Room Type", "O", 1, None, "0145"),
            ("IS", "Amount Type", "O", 1, None, "0146"),
            ("NM", "Coverage Amount", "O", 1, None, None),
            ("MOP", "Money Or Percentage", "O", 1, None, None),
        ),
    ),
    "RP": (
        "Reference Pointer",
        (
            ("ST", "Pointer", "O", 1, None, None),
            ("HD", "Application ID", "O", 1, None, None),
            ("ID", "Type Of Data", "O", 1, None, "0191"),
            ("ID", "Subtype", "O", 1, None, "0291"),
        ),
    ),
    "RPT": (
        "Repeat Pattern",
        (
            ("CWE", "Repeat Pattern Code", "O", 1, None, "0335"),
            ("ID", "Calendar Alignment", "O", 1, None, "0527"),
            ("NM", "Phase Range Begin Value", "O", 1, None, None),
            ("NM", "Phase Range End Value", "O", 1, None, None),
            ("NM", "Period Quantity", "O", 1, None, None),
            ("IS", "Period Units", "O", 1, None, None),
            ("ID", "Institution Specified Time", "O", 1, None, "0136"),
            ("ID", "Event", "O", 1, None, "0528"),
            ("NM", "Event Offset Quantity", "O", 1, None, None),
            ("IS", "Event Offset Units", "O", 1, None, None),
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
            ("ST", "Specialty Name", "O", 1, None, None),
            ("ST", "Governing Board", "O", 1, None, None),
            ("ID", "Eligible Or Certified", "O", 1, None, "0337"),
            ("DT", "Date Of Certification", "O", 1, None, None),
        ),
    ),
    "SPS": (
        "Specimen Source",
        (
            ("CWE", "Specimen Source Name Or Code", "O", 1, None, None),
            ("CWE", "Additives", "O", 1, None, "0371"),
            ("TX", "Specimen Collection Method", "O", 1, None, None),
            ("CWE", "Body Site", "O", 1, None, "0163"),
            ("CWE", "Site Modifier", "O", 1, None, "0495"),
            ("CWE", "Collection Method Modifier Code", "O", 1, None, None),
            ("CWE", "Specimen Role", "O", 1, None, "0369"),
        ),
    ),
    "SRT": (
        "Sort Order",
        (
            ("ST", "Sort By Field", "O", 1, None, None),
            ("ID", "Sequencing", "O", 1, None, "0397"),
        ),
    ),
    "TQ": (
        "Timing Quantity",
        (
            ("CQ_SIMPLE", "Quantity", "O", 1, None, None),
            ("RI", "Interval", "O", 1, None, None),
            ("ST", "Duration", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("ST", "Priority", "O", 1, None, None),
            ("ST", "Condition", "O", 1, None, None),
            ("TX", "Text", "O", 1, None, None),
            ("ID", "Conjunction", "O", 1, None, "0472"),
            ("OSD", "Order Sequencing", "O", 1, None, None),
            ("CE", "Occurrence Duration", "O", 1, None, None),
            ("NM", "Total Occurrences", "O", 1, None, None),
        ),
    ),
    "TS": (
        "Time Stamp",
        (
            ("DTM", "Time", "O", 1, 24, None),
            ("ID", "Degree of Precision", "O", 1, 1, "0529"),
        ),
    ),
    "UVC": (
        "UB Value Code and Amount",
        (
            ("CNE", "Value Code", "O", 1, None, "0153"),
            ("MO", "Value Amount", "O", 1, None, None),
        ),
    ),
    "VH": (
        "Visiting Hours",
        (
            ("ID", "Start Day Range", "O", 1, None, "0267"),
            ("ID", "End Day Range", "O", 1, None, "0267"),
            ("TM", "Start Hour Range", "O", 1, None, None),
            ("TM", "End Hour Range", "O", 1, None, None),
        ),
    ),
    "VID": (
        "Version Identifier",
        (
            ("ID", "Version ID", "O", 1, 5, "0104"),
            ("CE", "Internationalization Code", "O", 1, 483, "0399"),
            ("CE", "International Version ID", "O", 1, 483, None),
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
            ("NM", "Channel Number", "O", 1, None, None),
            ("ST", "Channel Name", "O", 1, None, None),
        ),
    ),
    "WVS": (
        "Waveform Source",
        (
            ("ST", "Source One Name", "O", 1, None, None),
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
            ("ID", "Country", "O", 1, None, "0399"),
            ("ID", "Address Type", "O", 1, None, "0190"),
            ("ST", "Other Geographic Designation", "O", 1, None, None),
            ("IS", "County Parish Code", "O", 1, None, "0289"),
            ("IS", "Census Tract", "O", 1, None, "0288"),
            ("ID", "Address Representation Code", "O", 1, None, "0465"),
            ("DR_SIMPLE", "Address Validity Range", "O", 1, None, None),
            ("TS", "Effective Date", "O", 1, None, None),
            ("TS", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "XCN": (
        "Extended Composite ID Number and Name for Persons",
        (
            ("ST", "ID Number", "O", 1, None, None),
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
            ("IS", "Degree E G Md", "O", 1, None, "0360"),
            ("IS", "Source Table", "O", 1, None, "0297"),
            ("HD", "Assigning Authority", "O", 1, None, "0363"),
            ("ID", "Name Type Code", "O", 1, None, "0200"),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, "0061"),
            ("ID", "Identifier Type Code", "O", 1, None, "0203"),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, "0465"),
            ("CE", "Name Context", "O", 1, None, "0448"),
            ("DR_SIMPLE", "Name Validity Range", "O", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, None, "0444"),
            ("TS", "Effective Date", "O", 1, None, None),
            ("TS", "Expiration Date", "O", 1, None, None),
            ("ST", "Professional Suffix", "O", 1, None, None),
            ("CWE", "Assigning Jurisdiction", "O", 1, None, None),
            ("CWE", "Assigning Agency Or Department", "O", 1, None, None),
        ),
    ),
    "XON": (
        "Extended Composite Name and Identification Number for Organizations",
        (
            ("ST", "Organization Name", "O", 1, None, None),
            ("IS", "Organization Name Type Code", "O", 1, None, "0204"),
            ("NM", "ID Number", "O", 1, None, None),
            ("NM", "Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, "0061"),
            ("HD", "Assigning Authority", "O", 1, None, "0363"),
            ("ID", "Identifier Type Code", "O", 1, None, "0203"),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("ID", "Name Representation Code", "O", 1, None, "0465"),
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
            ("IS", "Degree", "O", 1, 6, "0360"),
            ("ID", "Name Type Code", "O", 1, 1, "0200"),
            ("ID", "Name Representation Code", "O", 1, 1, "0465"),
            ("CE", "Name Context", "O", 1, 483, "0448"),
            ("DR_SIMPLE", "Name Validity Range", "O", 1, None, None),
            ("ID", "Name Assembly Order", "O", 1, 1, "0444"),
            ("TS", "Effective Date", "O", 1, 26, None),
            ("TS", "Expiration Date", "O", 1, 26, None),
            ("ST", "Professional Suffix", "O", 1, 199, None),
        ),
    ),
    "XTN": (
        "Extended Telecommunication Number",
        (
            ("ST", "Telephone Number", "O", 1, None, None),
            ("ID", "Telecommunication Use Code", "O", 1, None, "0201"),
            ("ID", "Telecommunication Equipment Type", "O", 1, None, "0202"),
            ("ST", "Email Address", "O", 1, None, None),
            ("NM", "Country Code", "O", 1, None, None),
            ("NM", "Area City Code", "O", 1, None, None),
            ("NM", "Local Number", "O", 1, None, None),
            ("NM", "Extension", "O", 1, None, None),
            ("ST", "Any Text", "O", 1, None, None),
            ("ST", "Extension Prefix", "O", 1, None, None),
            ("ST", "Speed Dial Code", "O", 1, None, None),
            ("ST", "Unformatted Telephone Number", "O", 1, None, None),
        ),
    ),
}
