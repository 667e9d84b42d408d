# src/hl7_definitions/data/v2_2/datatypes.py
"""HL7 v2.2 composite data types."""

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
            ("ID", "Type", "O", 1, None, "0190"),
            ("ST", "Other geographic designation", "O", 1, None, None),
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
            ("ST", "Assigning Facility ID", "O", 1, None, None),
        ),
    ),
    "CK_ACCOUNT_NO": (
        "Composite ID with Check Digit (Account Number)",
        (
            ("NM", "Account Number", "O", 1, None, None),
            ("NM", "Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("ID", "Facility ID", "O", 1, None, None),
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
            ("DT", "Date", "O", 1, None, None),
            ("ST", "Source", "O", 1, None, None),
        ),
    ),
    "CM_BATCH_TOTAL": (
        "Batch Totals",
        (
            ("NM", "Cm Batch Total 1", "O", 1, None, None),
            ("NM", "Cm Batch Total 2", "O", 1, None, None),
        ),
    ),
    "CM_CCD": (
        "Charge Time",
        (
            ("ID", "When To Charge", "O", 1, None, None),
            ("TS", "Date Time", "O", 1, None, None),
        ),
    ),
    "CM_DDI": (
        "Daily Deductible",
        (
            ("ST", "Delay Days", "O", 1, None, None),
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
            ("ID", "Day Type", "O", 1, None, None),
            ("NM", "Number Of Days", "O", 1, None, None),
        ),
    ),
    "CM_EIP": (
        "Parent Order",
        (
            ("ST", "Parent S Placer Order Number", "O", 1, None, None),
            ("ST", "Parent S Filler Order Number", "O", 1, None, None),
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
    "CM_FILLER": (
        "Filler Order Number",
        (
            ("ID", "Unique Filler ID", "O", 1, None, None),
            ("ID", "Filler Application ID", "O", 1, None, None),
        ),
    ),
    "CM_FINANCE": (
        "Financial Class",
        (
            ("ID", "Financial Class ID", "O", 1, None, None),
            ("TS", "Effective Date", "O", 1, None, None),
        ),
    ),
    "CM_GROUP_ID": (
        "Group ID",
        (
            ("ID", "Unique Group ID", "O", 1, None, None),
            ("ID", "Placer Application ID", "O", 1, None, None),
        ),
    ),
    "CM_INTERNAL_LOCATION": (
        "Internal Location",
        (
            ("ID", "Nurse Unit Station", "O", 1, None, None),
            ("ID", "Room", "O", 1, None, None),
            ("ID", "Bed", "O", 1, None, None),
            ("ID", "Facility ID", "O", 1, None, None),
            ("ID", "Bed Status", "O", 1, None, None),
            ("ID", "Etage", "O", 1, None, None),
            ("ID", "Klinik", "O", 1, None, None),
            ("ID", "Zentrum", "O", 1, None, None),
        ),
    ),
    "CM_JOB_CODE": (
        "Job Code",
        (
            ("ID", "Job Code", "O", 1, None, None),
            ("ID", "Employee Classification", "O", 1, None, None),
        ),
    ),
    "CM_LA1": (
        "Dispense Location",
        (
            (
                "CM_INTERNAL_LOCATION",
                "Dispense Deliver To Location",
                "O",
                1,
                None,
                None,
            ),
            ("AD", "Location", "O", 1, None, None),
        ),
    ),
    "CM_LICENSE_NO": (
        "License Number",
        (
            ("ST", "License Number", "O", 1, None, None),
            ("ST", "Issuing State Province Country", "O", 1, None, None),
        ),
    ),
    "CM_MOC": (
        "Charge to Practice",
        (
            ("ST", "Dollar Amount", "O", 1, None, None),
            ("ST", "Charge Code", "O", 1, None, None),
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
            ("CN", "Interpreter Technician", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("CM_INTERNAL_LOCATION", "Location", "O", 1, None, None),
        ),
    ),
    "CM_OCD": (
        "Occurrence",
        (
            ("ID", "Occurrence Code", "O", 1, None, None),
            ("DT", "Occurrence Date", "O", 1, None, None),
        ),
    ),
    "CM_OSP": (
        "Occurrence Span",
        (
            ("ID", "Occurrence Span Code", "O", 1, None, None),
            ("DT", "Occurrence Span Start Date", "O", 1, None, None),
            ("DT", "Occurrence Span Stop Date", "O", 1, None, None),
        ),
    ),
    "CM_PARENT_RESULT": (
        "Parent Result",
        (
            ("CE", "Observation Identifier Obx 3 Of Parent Result", "O", 1, None, None),
            ("ST", "Sub ID Obx 4 Of Parent Result", "O", 1, None, None),
            ("CE", "Result Obx 5 Of Parent Result", "O", 1, None, None),
        ),
    ),
    "CM_PAT_ID": (
        "Patient ID",
        (
            ("ST", "Patient ID", "O", 1, None, None),
            ("NM", "Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("ID", "Facility ID", "O", 1, None, None),
            ("ID", "Type", "O", 1, None, None),
        ),
    ),
    "CM_PAT_ID_0192": (
        "Patient ID",
        (
            ("ST", "Patient ID", "O", 1, None, None),
            ("NM", "Check Digit", "O", 1, None, None),
            ("ID", "Check Digit Scheme", "O", 1, None, None),
            ("ID", "Facility ID", "O", 1, None, None),
            ("ID", "Type", "O", 1, None, "0192"),
        ),
    ),
    "CM_PCF": (
        "Pre-certification Required",
        (
            ("ID", "Pre Certification Patient Type", "O", 1, None, None),
            ("ID", "Pre Certication Required", "O", 1, None, None),
            ("TS", "Pre Certification Window", "O", 1, None, None),
        ),
    ),
    "CM_PEN": (
        "Penalty",
        (
            ("ID", "Penalty ID", "O", 1, None, None),
            ("NM", "Penalty Amount", "O", 1, None, None),
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
    "CM_PLACER": (
        "Placer Order Number",
        (
            ("ID", "Unique Placer ID", "O", 1, None, None),
            ("ID", "Placer Application", "O", 1, None, None),
        ),
    ),
    "CM_PLN": (
        "Practitioner ID Numbers",
        (
            ("ST", "ID Number", "O", 1, None, None),
            ("ID", "Type Of ID Number ID", "O", 1, None, None),
            ("ST", "State Other Qualifiying Info", "O", 1, None, None),
        ),
    ),
    "CM_POSITION": (
        "Position",
        (
            ("ST", "Saal", "O", 1, None, None),
            ("ST", "Tisch", "O", 1, None, None),
            ("ST", "Stuhl", "O", 1, None, None),
        ),
    ),
    "CM_PRACTITIONER": (
        "Practitioner",
        (
            ("CN", "Procedure Practitioner ID", "O", 1, None, None),
            ("ID", "Procedure Practitioner Type", "O", 1, None, None),
        ),
    ),
    "CM_PTA": (
        "Policy Type",
        (
            ("ID", "Policy Type", "O", 1, None, "0147"),
            ("ID", "Amount Class", "O", 1, None, "0193"),
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
            ("CE", "Reference Range", "O", 1, None, None),
            ("ID", "Sex", "O", 1, None, None),
            ("CE", "Age Range", "O", 1, None, None),
            ("CE", "Gestational Age Range", "O", 1, None, None),
            ("ST", "Species", "O", 1, None, None),
            ("ID", "Race Subspecies", "O", 1, None, None),
            ("ST", "Text Condition", "O", 1, None, None),
        ),
    ),
    "CM_RMC": (
        "Room Coverage",
        (
            ("ID", "Room Type", "O", 1, None, None),
            ("ID", "Amount Type", "O", 1, None, None),
            ("NM", "Coverage Amount", "O", 1, None, None),
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
        ),
    ),
    "CM_UVC": (
        "Value Code",
        (
            ("ID", "Value Code", "O", 1, None, None),
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
    "CN": (
        "Composite ID number and name",
        (
            ("ID", "ID number", "O", 1, None, None),
            ("ST", "Family name", "O", 1, None, None),
            ("ST", "Given name", "O", 1, None, None),
            ("ST", "Middle initial or name", "O", 1, None, None),
            ("ST", "Suffix", "O", 1, None, None),
            ("ST", "Prefix", "O", 1, None, None),
            ("ST", "Degree", "O", 1, None, None),
            ("ID", "Source table id", "O", 1, None, None),
        ),
    ),
    "CQ": (
        "Composite quantity with units",
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
    "RI": (
        "Repeat Interval",
        (
            ("ST", "Repeat Pattern", "O", 1, None, None),
            ("ST", "Explicit Time Intevall", "O", 1, None, None),
        ),
    ),
    "TQ": (
        "Timing Quantity",
        (
            ("CQ", "Quantity", "O", 1, None, None),
            ("RI", "Interval", "O", 1, None, None),
            ("ST", "Duration", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("ID", "Priority", "O", 1, None, None),
            ("ST", "Condition", "O", 1, None, None),
            ("TX", "Text Tx", "O", 1, None, None),
            ("ID", "Conjunction", "O", 1, None, None),
            ("ST", "Order Sequencing", "O", 1, None, None),
        ),
    ),
    "TS": (
        "Time Stamp",
        (
            ("ST", "Time Of An Event", "O", 1, None, None),
            ("ST", "Degree Of Precision", "O", 1, None, None),
        ),
    ),
}
