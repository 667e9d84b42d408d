# src/hl7_definitions/data/v2_3/datatypes.py
"""HL7 v2.3 composite data types."""

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
    "CD": (
        "Channel Definition",
        (
            ("CM_WVI", "Channel Identifier", "O", 1, None, None),
            ("CM_ELECTRODE", "Electrode Names", "O", 1, None, None),
            ("CM_CSU", "Channel Sensitivity Units", "O", 1, None, None),
            ("CM_CP", "Calibration Parameters", "O", 1, None, None),
            ("NM", "Sampling Frequency", "O", 1, None, None),
            ("CM_MDV", "Minimum Maximum Data Values", "O", 1, None, None),
        ),
    ),
    "CE": (
        "Coded Element",
        (
            ("ID", "Identifier", "O", 1, None, None),
            ("ST", "Text", "O", 1, 199, None),
            ("ST", "Name Of Coding System", "O", 1, None, None),
            ("ID", "Alternate Identifier", "O", 1, None, None),
            ("ST", "Alternate Text", "O", 1, 199, None),
            ("ST", "Name Of Alternate Coding System", "O", 1, None, None),
        ),
    ),
    "CF": (
        "Coded Element with Formatted Values",
        (
            ("ID", "Identifier", "O", 1, None, None),
            ("FT", "Formatted Text", "O", 1, None, None),
            ("ST", "Name Of Coding System", "O", 1, None, None),
            ("ID", "Alternate Identifier", "O", 1, None, None),
            ("FT", "Alternate Formatted Text", "O", 1, None, None),
            ("ST", "Name Of Alternate Coding System", "O", 1, None, None),
        ),
    ),
    "CK": (
        "Composite ID with Check Digit",
        (
            ("NM", "ID Number Nm", "O", 1, None, None),
            ("ST", "Check Digit", "O", 1, None, None),
            (
                "ID",
                "Code Identifying The Check Digit Scheme Employed",
                "O",
                1,
                None,
                None,
            ),
            ("HD", "Assigning Authority", "O", 1, None, None),
        ),
    ),
    "CM_ABS_RANGE": (
        "Absolute Range",
        (
            ("CM_RANGE_SIMPLE", "Range", "O", 1, None, None),
            ("NM", "Numeric Change", "O", 1, None, None),
            ("NM", "Percent Per Change", "O", 1, None, None),
            ("NM", "Days", "O", 1, None, None),
        ),
    ),
    "CM_AUI": (
        "Authorization Information",
        (
            ("ST", "Authorization Number", "O", 1, None, None),
            ("TS", "Date", "O", 1, None, None),
            ("ST", "Source", "O", 1, None, None),
        ),
    ),
    "CM_CCD": (
        "Charge Time",
        (
            ("ID", "When To Charge Code", "O", 1, None, None),
            ("TS", "Date Time", "O", 1, None, None),
        ),
    ),
    "CM_CP": (
        "Cp",
        (
            ("NM", "Sensitivity Correction Factor", "O", 1, None, None),
            ("NM", "Baseline", "O", 1, None, None),
        ),
    ),
    "CM_CSU": (
        "Csu",
        (
            ("NM", "Sensitivity", "O", 1, None, None),
            ("ID", "Units Identifier", "O", 1, None, None),
            ("ST", "Units Text", "O", 1, None, None),
            ("ST", "Units Name Of Coding System", "O", 1, None, None),
            ("ID", "Units Alternate Identifier", "O", 1, None, None),
            ("ST", "Units Alternate Text", "O", 1, None, None),
            ("ST", "Units Name Of Alternate Coding System", "O", 1, None, None),
        ),
    ),
    "CM_DDI": (
        "Daily Deductible",
        (
            ("NM", "Delay Days", "O", 1, None, None),
            ("NM", "Amount", "O", 1, None, None),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "CM_DIN": (
        "Activation Date",
        (
            ("TS", "Date", "O", 1, None, None),
            ("CE", "Institution Name", "O", 1, None, None),
        ),
    ),
    "CM_DLD": (
        "Discharge Location",
        (
            ("ID", "Discharge Location", "O", 1, None, None),
            ("TS", "Effective Date", "O", 1, None, None),
        ),
    ),
    "CM_DLT": (
        "Delta Check",
        (
            ("CM_RANGE_SIMPLE", "Range", "O", 1, None, None),
            ("NM", "Numeric Threshold", "O", 1, None, None),
            ("ST", "Change", "O", 1, None, None),
            ("NM", "Length Of Time Days", "O", 1, None, None),
        ),
    ),
    "CM_DTN": (
        "Day Type and Number",
        (
            ("IS", "Day Type", "O", 1, None, None),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "CM_EIP": (
        "Parent Order",
        (
            ("EI", "Parent S Placer Order Number", "O", 1, None, None),
            ("EI", "Parent S Filler Order Number", "O", 1, None, None),
        ),
    ),
    "CM_ELD": (
        "Error Location and Description",
        (
            ("ST", "Segment ID", "O", 1, None, None),
            ("NM", "Sequence", "O", 1, None, None),
            ("NM", "Field Position", "O", 1, None, None),
            ("CE", "Code Identifying Error", "O", 1, None, None),
        ),
    ),
    "CM_ELECTRODE": (
        "Electrode",
        (
            ("ST", "Source Name 1", "O", 1, None, None),
            ("ST", "Source Name 2", "O", 1, None, None),
        ),
    ),
    "CM_LA1": (
        "Dispense Location",
        (
            ("ST", "Point Of Care St", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility Hd", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Person Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("ST", "Floor", "O", 1, None, None),
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
    "CM_MDV": (
        "Mdv",
        (
            ("NM", "Minimum Value", "O", 1, None, None),
            ("NM", "Maximum Value", "O", 1, None, None),
        ),
    ),
    "CM_MOC": (
        "Charge to Practice",
        (
            ("MO", "Dollar Amount", "O", 1, None, None),
            ("CE", "Charge Code", "O", 1, None, None),
        ),
    ),
    "CM_MSG": (
        "Message Type",
        (
            ("ID", "Message Type", "O", 1, None, None),
            ("ID", "Trigger Event", "O", 1, None, None),
        ),
    ),
    "CM_NDL": (
        "Observing Practitioner",
        (
            ("CN_SIMPLE", "Name", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("IS", "Point Of Care Is", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility Hd", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Person Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("ST", "Floor", "O", 1, None, None),
        ),
    ),
    "CM_OCD": (
        "Occurrence",
        (
            ("CE", "Occurrence Code", "O", 1, None, None),
            ("DT", "Occurrence Date", "O", 1, None, None),
        ),
    ),
    "CM_OS": (
        "Os",
        (
            ("ID", "Sequence Results Flag", "O", 1, None, None),
            ("ST", "Placer Order Number Entity Identifier", "O", 1, None, None),
            ("IS", "Placer Order Number Namespace ID", "O", 1, None, None),
            ("ST", "Filler Order Number Entity Identifier", "O", 1, None, None),
            ("IS", "Filler Order Number Namespace ID", "O", 1, None, None),
            ("ST", "Sequence Condition Value", "O", 1, None, None),
            ("NM", "Maximum Number Of Repeats", "O", 1, None, None),
            ("ST", "Placer Order Number Universal ID", "O", 1, None, None),
            ("ID", "Placer Order Number Universal ID Type", "O", 1, None, None),
            ("ST", "Filler Order Number Universal ID", "O", 1, None, None),
            ("ID", "Filler Order Number Universal ID Type", "O", 1, None, None),
        ),
    ),
    "CM_OSP": (
        "Occurrence Span",
        (
            ("CE", "Occurrence Span Code", "O", 1, None, None),
            ("DT", "Occurrence Span Start Date", "O", 1, None, None),
            ("DT", "Occurrence Span Stop Date", "O", 1, None, None),
        ),
    ),
    "CM_PCF": (
        "Pre-certification Required",
        (
            ("IS", "Pre Certification Patient Type", "O", 1, None, None),
            ("ID", "Pre Certification Required", "O", 1, None, None),
            ("TS", "Pre Certification Windwow", "O", 1, None, None),
        ),
    ),
    "CM_PEN": (
        "Penalty",
        (
            ("IS", "Penalty Type", "O", 1, None, None),
            ("NM", "Penalty Amount", "O", 1, None, None),
        ),
    ),
    "CM_PI": (
        "Pi",
        (
            ("ST", "ID Number St", "O", 1, None, None),
            ("IS", "Type Of ID Number Is", "O", 1, None, None),
            ("ST", "Other Qualifying Info", "O", 1, None, None),
        ),
    ),
    "CM_PIP": (
        "Privileges",
        (
            ("CE", "Privilege", "O", 1, None, None),
            ("CE", "Privilege Class", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
            ("DT", "Activation Date", "O", 1, None, None),
        ),
    ),
    "CM_PLN": (
        "Practitioner ID Numbers",
        (
            ("ST", "ID Number", "O", 1, None, None),
            ("IS", "Type Of ID Number Is", "O", 1, None, None),
            ("ST", "State Other Qualifying Info", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "CM_PRL": (
        "Prl",
        (
            ("CE", "Obx 3 Observation Identifier Of Parent Result", "O", 1, None, None),
            ("ST", "Obx 4 Sub ID Of Parent Result", "O", 1, None, None),
            ("TX", "Part Of Obx 5 Observation Result From Parent", "O", 1, None, None),
        ),
    ),
    "CM_PTA": (
        "Policy Type",
        (
            ("IS", "Policy Type", "O", 1, None, "0147"),
            ("IS", "Amount Class", "O", 1, None, "0193"),
            ("NM", "Amount", "O", 1, None, None),
        ),
    ),
    "CM_RANGE": (
        "Range",
        (
            ("CE", "Low Value", "O", 1, None, None),
            ("CE", "High Value", "O", 1, None, None),
        ),
    ),
    "CM_RANGE_SIMPLE": (
        "Range",
        (
            ("ST", "Low Value", "O", 1, None, None),
            ("ST", "High Value", "O", 1, None, None),
        ),
    ),
    "CM_RFR": (
        "Reference Range",
        (
            ("CM_RANGE_SIMPLE", "Reference Range", "O", 1, None, None),
            ("IS", "Sex", "O", 1, None, None),
            ("CM_RANGE_SIMPLE", "Age Range", "O", 1, None, None),
            ("CM_RANGE_SIMPLE", "Age Gestation", "O", 1, None, None),
            ("TX", "Species", "O", 1, None, None),
            ("ST", "Race Subspecies", "O", 1, None, None),
            ("TX", "Conditions", "O", 1, None, None),
        ),
    ),
    "CM_RMC": (
        "Room Coverage",
        (
            ("IS", "Room Type", "O", 1, None, "0145"),
            ("IS", "Amount Type", "O", 1, None, None),
            ("NM", "Coverage Amount", "O", 1, None, "0193"),
        ),
    ),
    "CM_SPD": (
        "Specialty",
        (
            ("ST", "Specialty Name", "O", 1, None, None),
            ("ST", "Governing Board", "O", 1, None, None),
            ("ID", "Eligible Or Certified", "O", 1, None, None),
            ("DT", "Date Of Certification", "O", 1, None, None),
        ),
    ),
    "CM_SPS": (
        "Specimen Source",
        (
            ("CE", "Specimen Source Name Or Code", "O", 1, None, None),
            ("TX", "Additives", "O", 1, None, None),
            ("TX", "Freetext", "O", 1, None, None),
            ("CE", "Body Site", "O", 1, None, None),
            ("CE", "Site Modifier", "O", 1, None, None),
            ("CE", "Collection Modifier Method Code", "O", 1, None, None),
        ),
    ),
    "CM_UVC": (
        "Value Code",
        (
            ("IS", "Value Code", "O", 1, None, None),
            ("NM", "Value Amount", "O", 1, None, None),
        ),
    ),
    "CM_VR": (
        "Value Qualifier",
        (
            ("ST", "First Data Code Value", "O", 1, None, None),
            ("ST", "Last Data Code Calue", "O", 1, None, None),
        ),
    ),
    "CM_WVI": (
        "Wvi",
        (
            ("NM", "Channel Number", "O", 1, None, None),
            ("ST", "Channel Name", "O", 1, None, None),
        ),
    ),
    "CN": (
        "Composite ID Number and Name",
        (
            ("ST", "ID Number St", "O", 1, None, None),
            ("ST", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            ("ST", "Middle Initial Or Name", "O", 1, None, None),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("ST", "Degree E G Md", "O", 1, None, None),
            ("ID", "Source Table", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
        ),
    ),
    "CN_SIMPLE": (
        "Composite ID Number and Name",
        (
            ("ST", "ID Number St", "O", 1, None, None),
            ("ST", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            ("ST", "Middle Initial Or Name", "O", 1, None, None),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("ST", "Degree E G Md", "O", 1, None, None),
            ("ID", "Source Table", "O", 1, None, None),
            ("ST", "Assigning Authority", "O", 1, None, None),
        ),
    ),
    "CP": (
        "Composite Price",
        (
            ("MO", "Price", "O", 1, None, None),
            ("ID", "Price Type", "O", 1, None, None),
            ("NM", "From Value", "O", 1, None, None),
            ("NM", "To Value", "O", 1, None, None),
            ("CE", "Range Units", "O", 1, None, None),
            ("ID", "Range Type", "O", 1, None, None),
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
    "CX": (
        "Extended Composite ID with Check Digit",
        (
            ("ST", "ID Number", "O", 1, 15, None),
            ("ST", "Check Digit", "O", 1, 1, None),
            (
                "ID",
                "Code Identifying the Check Digit Scheme Employed",
                "O",
                1,
                3,
                "0061",
            ),
            ("HD", "Assigning Authority", "O", 1, 227, "0363"),
            ("IS", "Identifier Type Code", "O", 1, None, "0203"),
            ("HD", "Assigning Facility", "O", 1, 227, None),
        ),
    ),
    "DLN": (
        "Driver's License Number",
        (
            ("ST", "Driver S License Number", "O", 1, None, None),
            ("IS", "Issuing State Province Country", "O", 1, None, None),
            ("DT", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "DR": (
        "Date/Time Range",
        (
            ("TS", "Range Start Date Time", "O", 1, None, None),
            ("TS", "Range End Date Time", "O", 1, None, None),
        ),
    ),
    "ED": (
        "Encapsulated Data",
        (
            ("HD", "Source Application", "O", 1, None, None),
            ("ID", "Type Of Data", "O", 1, None, None),
            ("ID", "Data", "O", 1, None, None),
            ("ID", "Encoding", "O", 1, None, None),
            ("ST", "Data", "O", 1, None, None),
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
    "FC": (
        "Financial Class",
        (
            ("IS", "Financial Class", "O", 1, None, None),
            ("TS", "Effective Date", "O", 1, None, None),
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
    "JCC": (
        "Job Code/Class",
        (
            ("IS", "Job Code", "O", 1, None, None),
            ("IS", "Job Class", "O", 1, None, None),
        ),
    ),
    "MA": (
        "Multiplexed Array",
        (
            ("NM", "Sample 1 From Channel 1", "O", 1, None, None),
            ("NM", "Sample 1 From Channel 2", "O", 1, None, None),
            ("NM", "Sample 1 From Channel 3", "O", 1, None, None),
            ("NM", "Sample 2 From Channel 1", "O", 1, None, None),
            ("NM", "Sample 2 From Channel 2", "O", 1, None, None),
            ("NM", "Sample 2 From Channel 3", "O", 1, None, None),
        ),
    ),
    "MO": (
        "Money",
        (
            ("NM", "Quantity", "O", 1, None, None),
            ("ID", "Denomination", "O", 1, None, None),
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
    "PL": (
        "Person Location",
        (
            ("ID", "Point Of Care ID", "O", 1, None, None),
            ("IS", "Room", "O", 1, None, None),
            ("IS", "Bed", "O", 1, None, None),
            ("HD", "Facility Hd", "O", 1, None, None),
            ("IS", "Location Status", "O", 1, None, None),
            ("IS", "Person Location Type", "O", 1, None, None),
            ("IS", "Building", "O", 1, None, None),
            ("ST", "Floor", "O", 1, None, None),
            ("ST", "Location Type", "O", 1, None, None),
        ),
    ),
    "PPN": (
        "Performing Person Time Stamp",
        (
            ("ST", "ID Number", "O", 1, None, None),
            ("ST", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            ("ST", "Middle Initial Or Name", "O", 1, None, None),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("ST", "Degree E G Md", "O", 1, None, None),
            ("ID", "Source Table", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("ID", "Name Type Code", "O", 1, None, None),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            (
                "ID",
                "Code Identifying The Check Digit Scheme Employed",
                "O",
                1,
                None,
                None,
            ),
            ("IS", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility", "O", 1, None, None),
            ("TS", "Date Time Action Performed", "O", 1, None, None),
        ),
    ),
    "PT": (
        "Processing Type",
        (
            ("ST", "Processing ID", "O", 1, None, None),
            ("ST", "Processing Mode", "O", 1, None, None),
        ),
    ),
    "QIP": (
        "Query Input Parameter List",
        (
            ("ST", "Field Name", "O", 1, None, None),
            ("ST", "VALUE1 VALUE2 VALUE3", "O", 1, None, None),
        ),
    ),
    "QSC": (
        "Query Selection Criteria",
        (
            ("ST", "Name Of Field", "O", 1, None, None),
            ("ID", "Relational Operator", "O", 1, None, None),
            ("ST", "Value", "O", 1, None, None),
            ("ID", "Relational Conjunction", "O", 1, None, None),
        ),
    ),
    "RCD": (
        "Row Column Definition",
        (
            ("ST", "HL7 Item Number", "O", 1, None, None),
            ("ST", "HL7 Date Type", "O", 1, None, None),
            ("NM", "Maximum Column Width", "O", 1, None, None),
        ),
    ),
    "RI": (
        "Repeat Interval",
        (
            ("IS", "Repeat Pattern", "O", 1, None, None),
            ("ST", "Explicit Time Interval", "O", 1, None, None),
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
    "SCV": (
        "Scheduling Class Value Pair",
        (
            ("IS", "Parameter Class", "O", 1, None, None),
            ("ST", "Parameter Value", "O", 1, None, None),
        ),
    ),
    "SN": (
        "Structured Numeric",
        (
            ("ST", "Comparator", "O", 1, None, None),
            ("NM", "NUM1", "O", 1, None, None),
            ("ST", "Separator Or Suffix", "O", 1, None, None),
            ("NM", "NUM2", "O", 1, None, None),
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
            ("TX", "Text Tx", "O", 1, None, None),
            ("ST", "Conjunction", "O", 1, None, None),
            ("CM_OS", "Order Sequencing", "O", 1, None, None),
        ),
    ),
    "TS": (
        "Time Stamp",
        (
            ("ST", "Time Of An Event", "O", 1, 26, None),
            ("ST", "Degree Of Precision", "O", 1, 1, "0529"),
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
    "XAD": (
        "Extended Address",
        (
            ("ST", "Street Address", "O", 1, None, None),
            ("ST", "Other Designation", "O", 1, None, None),
            ("ST", "City", "O", 1, None, None),
            ("ST", "State Or Province", "O", 1, None, None),
            ("ST", "Zip Or Postal Code", "O", 1, None, None),
            ("ID", "Country", "O", 1, None, None),
            ("ID", "Address Type", "O", 1, None, None),
            ("ST", "Other Geographic Designation", "O", 1, None, None),
            ("IS", "County Parish Code", "O", 1, None, None),
            ("IS", "Census Tract", "O", 1, None, None),
        ),
    ),
    "XCN": (
        "Extended Composite ID Number and Name for Persons",
        (
            ("ST", "ID Number St", "O", 1, None, None),
            ("ST", "Family Name", "O", 1, None, None),
            ("ST", "Given Name", "O", 1, None, None),
            ("ST", "Middle Initial Or Name", "O", 1, None, None),
            ("ST", "Suffix E G Jr Or Iii", "O", 1, None, None),
            ("ST", "Prefix E G Dr", "O", 1, None, None),
            ("ST", "Degree E G Md", "O", 1, None, None),
            ("ID", "Source Table", "O", 1, None, None),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("ID", "Name Type", "O", 1, None, None),
            ("ST", "Identifier Check Digit", "O", 1, None, None),
            (
                "ID",
                "Code Identifying The Check Digit Scheme Employed",
                "O",
                1,
                None,
                None,
            ),
            ("IS", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility ID", "O", 1, None, None),
        ),
    ),
    "XON": (
        "Extended Composite Name and Identification Number for Organizations",
        (
            ("ST", "Organization Name", "O", 1, None, None),
            ("IS", "Organization Name Type Code", "O", 1, None, None),
            ("NM", "ID Number Nm", "O", 1, None, None),
            ("ST", "Check Digit", "O", 1, None, None),
            (
                "ID",
                "Code Identifying The Check Digit Scheme Employed",
                "O",
                1,
                None,
                None,
            ),
            ("HD", "Assigning Authority", "O", 1, None, None),
            ("IS", "Identifier Type Code", "O", 1, None, None),
            ("HD", "Assigning Facility ID", "O", 1, None, None),
        ),
    ),
    "XPN": (
        "Extended Person Name",
        (
            ("ST", "Family Name", "O", 1, 48, None),
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
            ("ST", "Degree E G Md", "O", 1, None, None),
            ("ID", "Name Type Code", "O", 1, 1, "0200"),
            ("ID", "Name Representation Code", "O", 1, 1, "0465"),
        ),
    ),
    "XTN": (
        "Extended Telecommunication Number",
        (
            ("TN", "999 999 9999 X99999 C Any Text", "O", 1, None, None),
            ("ID", "Telecommunication Use Code", "O", 1, None, None),
            ("ID", "Telecommunication Equipment Type ID", "O", 1, None, None),
            ("ST", "Email Address", "O", 1, None, None),
            ("NM", "Country Code", "O", 1, None, None),
            ("NM", "Area City Code", "O", 1, None, None),
            ("NM", "Phone Number", "O", 1, None, None),
            ("NM", "Extension", "O", 1, None, None),
            ("ST", "Any Text", "O", 1, None, None),
        ),
    ),
}
