# src/hl7_definitions/data/v2_2/segments.py
"""HL7 v2.2 segment definitions."""

SEGMENTS = {
    "ACC": (
        "Accident",
        (
            ("TS", "Accident date / time", "O", 1, 26, None),
            ("ID", "Accident code", "O", 1, 2, "0050"),
            ("ST", "Accident location", "O", 1, 25, None),
        ),
    ),
    "ADD": ("Addendum", (("ST", "Addendum Continuation Pointer", "O", 1, None, None),)),
    "AL1": (
        "Patient allergy information",
        (
            ("SI", "Set ID - allergy", "R", 1, 4, None),
            ("ID", "Allergy type", "O", 1, 2, "0127"),
            ("CE", "Allergy code / mnemonic / description", "R", 1, 60, None),
            ("ID", "Allergy severity", "O", 1, 2, "0128"),
            ("ST", "Allergy reaction", "O", 1, 15, None),
            ("DT", "Identification date", "O", 1, 8, None),
        ),
    ),
    "ANYHL7SEGMENT": (
        "Any HL7 Segment",
        (
            ("varies", "Acc", "O", 0, None, None),
            ("varies", "Add", "O", 0, None, None),
            ("varies", "AL1", "O", 0, None, None),
            ("varies", "Bhs", "O", 0, None, None),
            ("varies", "Blg", "O", 0, None, None),
            ("varies", "Bts", "O", 0, None, None),
            ("varies", "DG1", "O", 0, None, None),
            ("varies", "Dsc", "O", 0, None, None),
            ("varies", "Dsp", "O", 0, None, None),
            ("varies", "Err", "O", 0, None, None),
            ("varies", "Evn", "O", 0, None, None),
            ("varies", "Fhs", "O", 0, None, None),
            ("varies", "FT1", "O", 0, None, None),
            ("varies", "Fts", "O", 0, None, None),
            ("varies", "GT1", "O", 0, None, None),
            ("varies", "IN1", "O", 0, None, None),
            ("varies", "IN2", "O", 0, None, None),
            ("varies", "IN3", "O", 0, None, None),
            ("varies", "Mfa", "O", 0, None, None),
            ("varies", "Mfe", "O", 0, None, None),
            ("varies", "Mfi", "O", 0, None, None),
            ("varies", "Mrg", "O", 0, None, None),
            ("varies", "Msa", "O", 0, None, None),
            ("varies", "Msh", "O", 0, None, None),
            ("varies", "Nck", "O", 0, None, None),
            ("varies", "NK1", "O", 0, None, None),
            ("varies", "Npu", "O", 0, None, None),
            ("varies", "Nsc", "O", 0, None, None),
            ("varies", "Nst", "O", 0, None, None),
            ("varies", "Nte", "O", 0, None, None),
            ("varies", "Obr", "O", 0, None, None),
            ("varies", "Obx", "O", 0, None, None),
            ("varies", "Ods", "O", 0, None, None),
            ("varies", "Odt", "O", 0, None, None),
            ("varies", "OM1", "O", 0, None, None),
            ("varies", "OM2", "O", 0, None, None),
            ("varies", "OM3", "O", 0, None, None),
            ("varies", "OM4", "O", 0, None, None),
            ("varies", "OM5", "O", 0, None, None),
            ("varies", "OM6", "O", 0, None, None),
            ("varies", "Orc", "O", 0, None, None),
            ("varies", "Pid", "O", 0, None, None),
            ("varies", "PR1", "O", 0, None, None),
            ("varies", "Pra", "O", 0, None, None),
            ("varies", "PV1", "O", 0, None, None),
            ("varies", "PV2", "O", 0, None, None),
            ("varies", "Qrd", "O", 0, None, None),
            ("varies", "Qrf", "O", 0, None, None),
            ("varies", "RQ1", "O", 0, None, None),
            ("varies", "Rqd", "O", 0, None, None),
            ("varies", "Rxa", "O", 0, None, None),
            ("varies", "Rxc", "O", 0, None, None),
            ("varies", "Rxd", "O", 0, None, None),
            ("varies", "Rxe", "O", 0, None, None),
            ("varies", "Rxg", "O", 0, None, None),
            ("varies", "Rxo", "O", 0, None, None),
            ("varies", "Rxr", "O", 0, None, None),
            ("varies", "Stf", "O", 0, None, None),
            ("varies", "UB1", "O", 0, None, None),
            ("varies", "UB2", "O", 0, None, None),
            ("varies", "Urd", "O", 0, None, None),
            ("varies", "Urs", "O", 0, None, None),
        ),
    ),
    "BHS": (
        "Batch Header",
        (
            ("ST", "Batch Field Separator", "R", 1, None, None),
            ("ST", "Batch Encoding Characters", "R", 1, None, None),
            ("ST", "Batch Sending Application", "O", 1, None, None),
            ("ST", "Batch Sending Facility", "O", 1, None, None),
            ("ST", "Batch Receiving Application", "O", 1, None, None),
            ("ST", "Batch Receiving Facility", "O", 1, None, None),
            ("TS", "Batch Creation Date Time", "O", 1, None, None),
            ("ST", "Batch Security", "O", 1, None, None),
            ("ST", "Batch Name ID Type", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("ST", "Batch Control ID", "O", 1, None, None),
            ("ST", "Reference Batch Control ID", "O", 1, None, None),
        ),
    ),
    "BLG": (
        "Billing",
        (
            ("CM_CCD", "When To Charge", "O", 1, None, "0100"),
            ("ID", "Charge Type", "O", 1, None, "0122"),
            ("CK_ACCOUNT_NO", "Account ID", "O", 1, None, None),
        ),
    ),
    "BTS": (
        "Batch Trailer",
        (
            ("ST", "Batch Message Count", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("CM_BATCH_TOTAL", "Batch Totals", "O", 0, None, None),
        ),
    ),
    "DG1": (
        "Diagnosis",
        (
            ("SI", "Set ID - diagnosis", "R", 1, 4, None),
            ("ID", "Diagnosis coding method", "R", 1, 2, "0053"),
            ("ID", "Diagnosis code", "O", 1, 8, "0051"),
            ("ST", "Diagnosis description", "O", 1, 40, None),
            ("TS", "Diagnosis date / time", "O", 1, 26, None),
            ("ID", "Diagnosis / DRG type", "R", 1, 2, "0052"),
            ("CE", "Major Diagnostic Category", "O", 1, None, "0118"),
            ("ID", "Diagnostic related group", "O", 1, 4, "0055"),
            ("ID", "DRG approval indicator", "O", 1, 2, None),
            ("ID", "DRG grouper review code", "O", 1, 2, "0056"),
            ("ID", "Outlier type", "O", 1, 2, "0083"),
            ("NM", "Outlier days", "O", 1, 3, None),
            ("NM", "Outlier cost", "O", 1, 12, None),
            ("ST", "Grouper version and type", "O", 1, 4, None),
            ("NM", "Diagnosis / DRG priority", "O", 1, 2, None),
            ("CN", "Diagnosing clinician", "O", 1, 60, None),
        ),
    ),
    "DSC": (
        "Continuation pointer",
        (("ST", "Continuation pointer", "O", 1, 180, None),),
    ),
    "DSP": (
        "Display Data",
        (
            ("SI", "Set ID Display Data", "O", 1, None, None),
            ("SI", "Display Level", "O", 1, None, None),
            ("TX", "Data Line", "R", 1, None, None),
            ("ST", "Logical Break Point", "O", 1, None, None),
            ("TX", "Result ID", "O", 1, None, None),
        ),
    ),
    "ERR": ("Error", (("CM_ELD", "Error Code And Location", "R", 0, None, "0060"),)),
    "EVN": (
        "Event type",
        (
            ("ID", "Event type code", "R", 1, 3, "0003"),
            ("TS", "Date / time of event", "R", 1, 26, None),
            ("TS", "Date / time planned event", "O", 1, 26, None),
            ("ID", "Event reason code", "O", 1, 3, "0062"),
            ("ID", "Operator ID", "O", 1, 5, "0188"),
        ),
    ),
    "FHS": (
        "File Header",
        (
            ("ST", "File Field Separator", "R", 1, None, None),
            ("ST", "File Encoding Characters", "R", 1, None, None),
            ("ST", "File Sending Application", "O", 1, None, None),
            ("ST", "File Sending Facility", "O", 1, None, None),
            ("ST", "File Receiving Application", "O", 1, None, None),
            ("ST", "File Receiving Facility", "O", 1, None, None),
            ("TS", "File Creation Date Time", "O", 1, None, None),
            ("ST", "File Security", "O", 1, None, None),
            ("ST", "File Name ID", "O", 1, None, None),
            ("ST", "File Header Comment", "O", 1, None, None),
            ("ST", "File Control ID", "O", 1, None, None),
            ("ST", "Reference File Control ID", "O", 1, None, None),
        ),
    ),
    "FT1": (
        "Financial Transaction",
        (
            ("SI", "Set ID Financial Transaction", "O", 1, None, None),
            ("ST", "Transaction ID", "O", 1, None, None),
            ("ST", "Transaction Batch ID", "O", 1, None, None),
            ("DT", "Transaction Date", "R", 1, None, None),
            ("DT", "Transaction Posting Date", "O", 1, None, None),
            ("ID", "Transaction Type", "R", 1, None, "0017"),
            ("CE", "Transaction Code", "R", 1, None, "0132"),
            ("ST", "Transaction Description", "O", 1, None, None),
            ("ST", "Transaction Description Alternate", "O", 1, None, None),
            ("NM", "Transaction Quantity", "O", 1, None, None),
            ("NM", "Transaction Amount Extended", "O", 1, None, None),
            ("NM", "Transaction Amount Unit", "O", 1, None, None),
            ("CE", "Department Code", "O", 1, None, "0049"),
            ("ID", "Insurance Plan ID", "R", 1, None, "0072"),
            ("NM", "Insurance Amount", "O", 1, None, None),
            ("CM_INTERNAL_LOCATION", "Assigned Patient Location", "O", 1, None, "0079"),
            ("ID", "Fee Schedule", "O", 1, None, "0024"),
            ("ID", "Patient Type", "O", 1, None, "0018"),
            ("CE", "Diagnosis Code", "O", 0, None, "0051"),
            ("CN", "Performed By Code", "O", 1, None, "0084"),
            ("CN", "Ordered By Code", "O", 1, None, None),
            ("NM", "Unit Cost", "O", 1, None, None),
            ("CM_FILLER", "Filler Order Number", "O", 1, None, None),
        ),
    ),
    "FTS": (
        "File Trailer",
        (
            ("NM", "File Batch Count", "O", 1, None, None),
            ("ST", "File Trailer Comment", "O", 1, None, None),
        ),
    ),
    "GT1": (
        "Guarantor",
        (
            ("SI", "Set ID - guarantor", "R", 1, 4, None),
            ("CK", "Guarantor number", "O", 1, 20, None),
            ("PN", "Guarantor name", "R", 1, 48, None),
            ("PN", "Guarantor spouse name", "O", 1, 48, None),
            ("AD", "Guarantor address", "O", 1, 106, None),
            ("TN", "Guarantor phone number - home", "O", 0, 40, None),
            ("TN", "Guarantor phone number - business", "O", 0, 40, None),
            ("DT", "Guarantor date of birth", "O", 1, 8, None),
            ("ID", "Guarantor sex", "O", 1, 1, "0001"),
            ("ID", "Guarantor type", "O", 1, 2, "0068"),
            ("ID", "Guarantor relationship", "O", 1, 2, "0063"),
            ("ST", "Guarantor social security number", "O", 1, 11, None),
            ("DT", "Guarantor date - begin", "O", 1, 8, None),
            ("DT", "Guarantor date - end", "O", 1, 8, None),
            ("NM", "Guarantor priority", "O", 1, 2, None),
            ("ST", "Guarantor employer name", "O", 1, 45, None),
            ("AD", "Guarantor employer address", "O", 1, 106, None),
            ("TN", "Guarantor employ phone number", "O", 0, 40, None),
            ("ST", "Guarantor employee ID number", "O", 1, 20, None),
            ("ID", "Guarantor employment status", "O", 1, 2, "0066"),
            ("ST", "Guarantor organization", "O", 1, 60, None),
        ),
    ),
    "IN1": (
        "Insurance",
        (
            ("SI", "Set ID - insurance", "R", 1, 4, None),
            ("ID", "Insurance plan ID", "R", 1, 8, "0072"),
            ("ST", "Insurance company ID", "R", 1, 59, None),
            ("ST", "Insurance company name", "O", 1, 45, None),
            ("AD", "Insurance company address", "O", 1, 106, None),
            ("PN", "Insurance company contact pers", "O", 1, 48, None),
            ("TN", "Insurance company phone number", "O", 0, 40, None),
            ("ST", "Group number", "O", 1, 12, None),
            ("ST", "Group name", "O", 1, 35, None),
            ("ST", "Insured's group employer ID", "O", 1, 12, None),
            ("ST", "Insured's group employer name", "O", 1, 45, None),
            ("DT", "Plan effective date", "O", 1, 8, None),
            ("DT", "Plan expiration date", "O", 1, 8, None),
            ("CM_AUI", "Authorization Information", "O", 1, None, None),
            ("ID", "Plan type", "O", 1, 5, "0086"),
            ("PN", "Name of insured", "O", 1, 48, None),
            ("ID", "Insured's relationship to patient", "O", 1, 2, "0063"),
            ("DT", "Insured's date of birth", "O", 1, 8, None),
            ("AD", "Insured's address", "O", 1, 106, None),
            ("ID", "Assignment of benefits", "O", 1, 2, "0135"),
            ("ID", "Coordination of benefits", "O", 1, 2, "0173"),
            ("ST", "Coordination of benefits - priority", "O", 1, 2, None),
            ("ID", "Notice of admission code", "O", 1, 2, "0136"),
            ("DT", "Notice of admission date", "O", 1, 8, None),
            ("ID", "Rpt of eligibility code", "O", 1, 2, "0136"),
            ("DT", "Rpt of eligibility date", "O", 1, 8, None),
            ("ID", "Release information code", "O", 1, 2, "0093"),
            ("ST", "Pre-admit certification (PAC)", "O", 1, 15, None),
            ("TS", "Verification date / time", "O", 1, 26, None),
            ("CN", "Verification by", "O", 1, 60, None),
            ("ID", "Type of agreement code", "O", 1, 2, "0098"),
            ("ID", "Billing status", "O", 1, 2, "0022"),
            ("NM", "Lifetime reserve days", "O", 1, 4, None),
            ("NM", "Delay before lifetime reserve days", "O", 1, 4, None),
            ("ID", "Company plan code", "O", 1, 8, "0042"),
            ("ST", "Policy number", "O", 1, 15, None),
            ("NM", "Policy deductible", "O", 1, 12, None),
            ("NM", "Policy limit - amount", "O", 1, 12, None),
            ("NM", "Policy limit - days", "O", 1, 4, None),
            ("NM", "Room rate - semi-private", "O", 1, 12, None),
            ("NM", "Room rate - private", "O", 1, 12, None),
            ("CE", "Insured's employment status", "O", 1, 60, "0066"),
            ("ID", "Insured's sex", "O", 1, 1, "0001"),
            ("AD", "Insured S Employer Address", "O", 1, None, None),
            ("ST", "Verification Status", "O", 1, None, None),
            ("ID", "Prior Insurance Plan ID", "O", 1, None, "0072"),
        ),
    ),
    "IN2": (
        "Insurance additional information",
        (
            ("ST", "Insured's employee ID", "O", 1, 15, None),
            ("ST", "Insured's social security number", "O", 1, 11, None),
            ("CN", "Insured's employer name", "O", 1, 60, None),
            ("ID", "Employer information data", "O", 1, 1, "0139"),
            ("ID", "Mail claim party", "O", 1, 1, "0137"),
            ("NM", "Medicare health insurance card number", "O", 1, 15, None),
            ("PN", "Medicaid case name", "O", 1, 48, None),
            ("NM", "Medicaid case number", "O", 1, 15, None),
            ("PN", "Champus sponsor name", "O", 1, 48, None),
            ("NM", "Champus ID number", "O", 1, 20, None),
            ("ID", "Dependent of champus recipient", "O", 1, 1, None),
            ("ST", "Champus organization", "O", 1, 25, None),
            ("ST", "Champus station", "O", 1, 25, None),
            ("ID", "Champus service", "O", 1, 14, "0140"),
            ("ID", "Champus rank / grade", "O", 1, 2, "0141"),
            ("ID", "Champus status", "O", 1, 3, "0142"),
            ("DT", "Champus retire date", "O", 1, 8, None),
            ("ID", "Champus non-availability certification on file", "O", 1, 1, "0136"),
            ("ID", "Baby coverage", "O", 1, 1, "0136"),
            ("ID", "Combine baby bill", "O", 1, 1, "0136"),
            ("NM", "Blood deductible", "O", 1, 1, None),
            ("PN", "Special coverage approval name", "O", 1, 48, None),
            ("ST", "Special coverage approval title", "O", 1, 30, None),
            ("ID", "Non-covered insurance code", "O", 0, 8, "0143"),
            ("ST", "Payor ID", "O", 1, 6, None),
            ("ST", "Payor subscriber ID", "O", 1, 6, None),
            ("ID", "Eligibility source", "O", 1, 1, "0144"),
            ("CM_RMC", "Room Coverage Type Amount", "O", 0, None, "0145"),
            ("CM_PTA", "Policy Type Amount", "O", 0, None, "0147"),
            ("CM_DDI", "Daily Deductible", "O", 1, None, None),
        ),
    ),
    "IN3": (
        "Insurance additional information, certification",
        (
            ("SI", "Set ID - insurance certification", "R", 1, 4, None),
            ("ST", "Certification number", "O", 1, 25, None),
            ("CN", "Certified by", "O", 1, 60, None),
            ("ID", "Certification required", "O", 1, 1, "0136"),
            ("CM_PEN", "Penalty", "O", 1, None, "0148"),
            ("TS", "Certification date / time", "O", 1, 26, None),
            ("TS", "Certification modify date / time", "O", 1, 26, None),
            ("CN", "Operator", "O", 1, 60, None),
            ("DT", "Certification begin date", "O", 1, 8, None),
            ("DT", "Certification end date", "O", 1, 8, None),
            ("CM_DTN", "Days", "O", 1, None, "0149"),
            ("CE", "Non-concur code / description", "O", 1, 60, "0233"),
            ("TS", "Non-concur effective date / time", "O", 1, 26, None),
            ("CN", "Physician reviewer", "O", 1, 60, "0010"),
            ("ST", "Certification contact", "O", 1, 48, None),
            ("TN", "Certification contact phone number", "O", 0, 40, None),
            ("CE", "Appeal reason", "O", 1, 60, "0345"),
            ("CE", "Certification agency", "O", 1, 60, "0346"),
            ("TN", "Certification agency phone number", "O", 0, 40, None),
            ("CM_PCF", "Pre Certification Required Window", "O", 0, None, "0150"),
            ("ST", "Case manager", "O", 1, 48, None),
            ("DT", "Second opinion date", "O", 1, 8, None),
            ("ID", "Second opinion status", "O", 1, 1, "0151"),
            ("ID", "Second opinion documentation received", "O", 1, 1, "0152"),
            ("CN", "Second opinion practitioner", "O", 1, 60, "0010"),
        ),
    ),
    "MFA": (
        "Master File Acknowledgment",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("TS", "Event Completion Date Time", "O", 1, None, None),
            ("CE", "Error Return Code And Or Text", "R", 1, None, "0181"),
            ("CE", "Primary Key Value", "R", 0, None, None),
        ),
    ),
    "MFE": (
        "Master File Entry",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("TS", "Effective Date Time", "O", 1, None, None),
            ("CE", "Primary Key Value", "R", 0, None, None),
        ),
    ),
    "MFI": (
        "Master File Identification",
        (
            ("CE", "Master File Identifier", "R", 1, None, "0175"),
            ("ID", "Master File Application Identifier", "O", 1, None, "0176"),
            ("ID", "File Level Event Code", "R", 1, None, "0178"),
            ("TS", "Entered Date Time", "O", 1, None, None),
            ("TS", "Effective Date Time", "O", 1, None, None),
            ("ID", "Response Level Code", "R", 1, None, "0179"),
        ),
    ),
    "MRG": (
        "Merge Patient Information",
        (
            ("CM_PAT_ID", "Prior Patient ID Internal", "R", 1, None, None),
            ("CM_PAT_ID", "Prior Alternate Patient ID", "O", 1, None, None),
            ("CK_ACCOUNT_NO", "Prior Patient Account Number", "O", 1, None, None),
            ("CM_PAT_ID", "Prior Patient ID External", "O", 1, None, None),
        ),
    ),
    "MSA": (
        "Message acknowledgement",
        (
            ("ID", "Acknowledgement code", "R", 1, 2, "0008"),
            ("ST", "Message control ID", "R", 1, 20, None),
            ("ST", "Text message", "O", 1, 80, None),
            ("NM", "Expected sequence number", "O", 1, 15, None),
            ("ID", "Delayed acknowledgement type", "O", 1, 1, "0102"),
            ("CE", "Error condition", "O", 1, 100, None),
        ),
    ),
    "MSH": (
        "Message header segment",
        (
            ("ST", "Field separator", "R", 1, 1, None),
            ("ST", "Encoding characters", "R", 1, 4, None),
            ("ST", "Sending application", "O", 1, 15, None),
            ("ST", "Sending facility", "O", 1, 20, None),
            ("ST", "Receiving application", "O", 1, 30, None),
            ("ST", "Receiving facility", "O", 1, 30, None),
            ("TS", "Date / Time of message", "O", 1, 26, None),
            ("ST", "Security", "O", 1, 40, None),
            ("CM_MSG", "Message Type", "R", 1, None, "0076"),
            ("ST", "Message control ID", "R", 1, 20, None),
            ("ID", "Processing ID", "R", 1, 1, "0103"),
            ("ID", "Version ID", "R", 1, 8, "0104"),
            ("NM", "Sequence number", "O", 1, 15, None),
            ("ST", "Continuation pointer", "O", 1, 180, None),
            ("ID", "Accept acknowledgement type", "O", 1, 2, "0155"),
            ("ID", "Application acknowledgement type", "O", 1, 2, "0155"),
            ("ID", "Country code", "O", 1, 2, None),
        ),
    ),
    "NCK": ("System Clock", (("TS", "System Date Time", "R", 1, None, None),)),
    "NK1": (
        "Next of kin",
        (
            ("SI", "Set ID - Next of kin", "R", 1, 4, None),
            ("PN", "Name", "O", 1, 48, None),
            ("CE", "Relationship", "O", 1, 15, "0063"),
            ("AD", "Address", "O", 1, 106, None),
            ("TN", "Phone number", "O", 0, 40, None),
            ("TN", "Business phone number", "O", 1, 40, None),
            ("CE", "Contact Role", "O", 1, None, "0131"),
            ("DT", "Start date", "O", 1, 8, None),
            ("DT", "End date", "O", 1, 8, None),
            ("ST", "Next of kin job title", "O", 1, 60, None),
            ("CM_JOB_CODE", "Next Of Kin Job Code Class", "O", 1, None, None),
            ("ST", "Next Of Kin Employee Number", "O", 1, None, None),
            ("ST", "Organization name", "O", 1, 60, None),
        ),
    ),
    "NPU": (
        "Bed Status Update",
        (
            ("CM_INTERNAL_LOCATION", "Bed Location", "R", 1, None, "0079"),
            ("ID", "Bed Status", "O", 1, None, "0116"),
        ),
    ),
    "NSC": (
        "Application Status Change",
        (
            ("ID", "Network Change Type", "R", 1, None, None),
            ("ST", "Current Cpu", "O", 1, None, None),
            ("ST", "Current Fileserver", "O", 1, None, None),
            ("ST", "Current Application", "O", 1, None, None),
            ("ST", "Current Facility", "O", 1, None, None),
            ("ST", "New Cpu", "O", 1, None, None),
            ("ST", "New Fileserver", "O", 1, None, None),
            ("ST", "New Application", "O", 1, None, None),
            ("ST", "New Facility", "O", 1, None, None),
        ),
    ),
    "NST": (
        "Application Control Level Statistics",
        (
            ("ID", "Statistics Available", "R", 1, None, "0136"),
            ("ST", "Source Identifier", "O", 1, None, None),
            ("ID", "Source Type", "O", 1, None, None),
            ("TS", "Statistics Start", "O", 1, None, None),
            ("TS", "Statistics End", "O", 1, None, None),
            ("NM", "Receive Character Count", "O", 1, None, None),
            ("NM", "Send Character Count", "O", 1, None, None),
            ("NM", "Message Received", "O", 1, None, None),
            ("NM", "Message Sent", "O", 1, None, None),
            ("NM", "Checksum Errors Received", "O", 1, None, None),
            ("NM", "Length Errors Received", "O", 1, None, None),
            ("NM", "Other Errors Received", "O", 1, None, None),
            ("NM", "Connect Timeouts", "O", 1, None, None),
            ("NM", "Receive Timeouts", "O", 1, None, None),
            ("NM", "Network Errors", "O", 1, None, None),
        ),
    ),
    "NTE": (
        "Notes and comments",
        (
            ("SI", "Set ID - notes and comments", "O", 1, 4, None),
            ("ID", "Source of comment", "O", 1, 8, "0105"),
            ("FT", "Comment", "O", 0, 65536, None),
        ),
    ),
    "OBR": (
        "Observation request",
        (
            ("SI", "Set ID - observation request", "O", 1, 4, None),
            ("CM_PLACER", "Placer Order Number", "O", 1, None, None),
            ("CM_FILLER", "Filler Order Number", "O", 1, None, None),
            ("CE", "Universal service ID", "R", 1, 200, None),
            ("ID", "Priority", "O", 1, 2, None),
            ("TS", "Requested date / time", "O", 1, 26, None),
            ("TS", "Observation date / time", "O", 1, 26, None),
            ("TS", "Observation end date / time", "O", 1, 26, None),
            ("CQ", "Collection volume", "O", 1, 20, None),
            ("CN", "Collector identifier", "O", 0, 60, None),
            ("ID", "Specimen action code", "O", 1, 1, "0065"),
            ("CE", "Danger code", "O", 1, 60, None),
            ("ST", "Relevant clinical information", "O", 1, 300, None),
            ("TS", "Specimen received date / time", "O", 1, 26, None),
            ("CM_SPS", "Specimen Source", "O", 1, None, "0070"),
            ("CN", "Ordering provider", "O", 1, 80, None),
            ("TN", "Order call-back phone number", "O", 0, 40, None),
            ("ST", "Placer field 1", "O", 1, 60, None),
            ("ST", "Placer field 2", "O", 1, 60, None),
            ("ST", "Filler field 1", "O", 1, 60, None),
            ("ST", "Filler field 2", "O", 1, 60, None),
            ("TS", "Results report / status change - date / time", "O", 1, 26, None),
            ("CM_MOC", "Charge To Practice", "O", 1, None, None),
            ("ID", "Diagnostic service section ID", "O", 1, 10, "0074"),
            ("ID", "Result status", "O", 1, 1, "0123"),
            ("CM_PARENT_RESULT", "Parent Result", "O", 1, None, None),
            ("TQ", "Quantity / timing", "O", 0, 200, None),
            ("CN", "Result copies to", "O", 0, 150, None),
            ("CM_EIP", "Parent Number", "O", 1, None, None),
            ("ID", "Transportation mode", "O", 1, 20, "0124"),
            ("CE", "Reason for study", "O", 0, 300, None),
            ("CM_NDL", "Principal Result Interpreter", "O", 1, None, None),
            ("CM_NDL", "Assistant Result Interpreter", "O", 0, None, None),
            ("CM_NDL", "Technician", "O", 0, None, None),
            ("CM_NDL", "Transcriptionist", "O", 0, None, None),
            ("TS", "Scheduled date / time", "O", 1, 26, None),
        ),
    ),
    "OBX": (
        "Observation / result",
        (
            ("SI", "Set ID - observational simple", "O", 1, 10, None),
            ("ID", "Value type", "R", 1, 2, "0125"),
            ("CE", "Observation identifier", "R", 1, 80, None),
            ("ST", "Observation sub-ID", "O", 1, 20, None),
            ("varies", "Observation value", "O", 1, 65536, None),
            ("CE", "Units", "O", 1, 60, None),
            ("ST", "References range", "O", 1, 60, None),
            ("ID", "Abnormal flags", "O", 0, 5, "0078"),
            ("NM", "Probability", "O", 1, 5, None),
            ("ID", "Nature of abnormal test", "O", 1, 2, "0080"),
            ("ID", "Observation result status", "R", 1, 2, "0085"),
            ("TS", "Date last observation normal values", "O", 1, 26, None),
            ("ST", "User defined access checks", "O", 1, 20, None),
            ("TS", "Date / time of the observation", "O", 1, 26, None),
            ("CE", "Producer's ID", "O", 1, 60, None),
            ("CN", "Responsible observer", "O", 1, 60, None),
        ),
    ),
    "ODS": (
        "Dietary Orders, Supplements, and Preferences",
        (
            ("ID", "Type", "R", 1, None, "0159"),
            ("CE", "Service Period", "O", 0, None, None),
            ("CE", "Diet Supplement Or Preference Code", "R", 0, None, None),
            ("ST", "Text Instruction", "O", 0, None, None),
        ),
    ),
    "ODT": (
        "Diet Tray Instructions",
        (
            ("CE", "Tray Type", "R", 1, None, "0160"),
            ("CE", "Service Period", "O", 0, None, None),
            ("ST", "Text Instruction", "O", 0, None, None),
        ),
    ),
    "OM1": (
        "General Segment",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("CE", "Producer S Test Observation ID", "R", 1, None, None),
            ("ID", "Permitted Data Types", "O", 0, None, "0125"),
            ("ID", "Specimen Required", "R", 1, None, "0136"),
            ("CE", "Producer ID", "R", 1, None, None),
            ("TX", "Observation Description", "O", 1, None, None),
            (
                "CE",
                "Other Test Observation Ids For The Observation",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Other Names", "R", 0, None, None),
            ("ST", "Preferred Report Name For The Observation", "O", 1, None, None),
            (
                "ST",
                "Preferred Short Name Or Mnemonic For Observation",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Preferred Long Name For The Observation", "O", 1, None, None),
            ("ID", "Orderability", "O", 1, None, "0136"),
            (
                "CE",
                "Identity Of Instrument Used To Perform This Study",
                "O",
                0,
                None,
                None,
            ),
            ("CE", "Coded Representation Of Method", "O", 0, None, None),
            ("ID", "Portable", "O", 1, None, "0136"),
            ("ID", "Observation Producing Department Section", "O", 0, None, None),
            ("TN", "Telephone Number Of Section", "O", 1, None, None),
            ("ID", "Nature Of Test Observation", "R", 1, None, "0174"),
            ("CE", "Report Subheader", "O", 1, None, None),
            ("ST", "Report Display Order", "O", 1, None, None),
            (
                "TS",
                "Date Time Stamp For Any Change In Definition For Obs",
                "R",
                1,
                None,
                None,
            ),
            ("TS", "Effective Date Time Of Change", "O", 1, None, None),
            ("NM", "Typical Turn Around Time", "O", 1, None, None),
            ("NM", "Processing Time", "O", 1, None, None),
            ("ID", "Processing Priority", "O", 0, None, "0168"),
            ("ID", "Reporting Priority", "O", 1, None, "0169"),
            (
                "CE",
                "Outside Site S Where Observation May Be Performed",
                "O",
                0,
                None,
                None,
            ),
            ("AD", "Address Of Outside Site S", "O", 0, None, None),
            ("TN", "Phone Number Of Outside Site", "O", 0, None, None),
            ("ID", "Confidentiality Code", "O", 1, None, "0177"),
            (
                "CE",
                "Observations Required To Interpret The Observation",
                "O",
                0,
                None,
                None,
            ),
            ("TX", "Interpretation Of Observations", "O", 1, None, None),
            ("CE", "Contraindications To Observations", "O", 0, None, None),
            ("CE", "Reflex Tests Observations", "O", 0, None, None),
            ("ST", "Rules That Trigger Reflex Testing", "O", 1, None, None),
            ("CE", "Fixed Canned Message", "O", 0, None, None),
            ("TX", "Patient Preparation", "O", 1, None, None),
            ("CE", "Procedure Medication", "O", 1, None, None),
            ("TX", "Factors That May Affect The Observation", "O", 1, None, None),
            ("ST", "Test Observation Performance Schedule", "O", 0, None, None),
            ("TX", "Description Of Test Methods", "O", 1, None, None),
        ),
    ),
    "OM2": (
        "Numeric Observation",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("CE", "Units Of Measure", "O", 1, None, None),
            ("NM", "Range Of Decimal Precision", "O", 1, None, None),
            ("CE", "Corresponding Si Units Of Measure", "O", 1, None, None),
            ("TX", "Si Conversion Factor", "R", 0, None, None),
            (
                "CM_RFR",
                "Reference Normal Range Ordinal Continuous Observations",
                "O",
                0,
                None,
                None,
            ),
            (
                "CM_RANGE",
                "Critical Range For Ordinal And Continuous Observations",
                "O",
                1,
                None,
                None,
            ),
            (
                "CM_ABS_RANGE",
                "Absolute Range For Ordinal And Continuous Observations",
                "O",
                1,
                None,
                None,
            ),
            ("CM_DLT", "Delta Check Criteria", "O", 0, None, None),
            ("NM", "Minimum Meaningful Increments", "O", 1, None, None),
        ),
    ),
    "OM3": (
        "Categorical Service/Test/Observation",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("ID", "Preferred Coding System", "O", 1, None, None),
            ("CE", "Valid Coded Answers", "O", 0, None, None),
            (
                "CE",
                "Normal Test Codes For Categorical Observations",
                "O",
                0,
                None,
                None,
            ),
            (
                "CE",
                "Abnormal Test Codes For Categorical Observations",
                "O",
                1,
                None,
                None,
            ),
            (
                "CE",
                "Critical Test Codes For Categorical Observations",
                "O",
                1,
                None,
                None,
            ),
            ("ID", "Data Type", "O", 1, None, None),
        ),
    ),
    "OM4": (
        "Observations that Require Specimens",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("ID", "Derived Specimen", "O", 1, None, "0170"),
            ("TX", "Container Description", "O", 1, None, None),
            ("NM", "Container Volume", "O", 1, None, None),
            ("CE", "Container Units", "O", 1, None, None),
            ("CE", "Specimen", "O", 1, None, None),
            ("CE", "Additive", "O", 1, None, None),
            ("TX", "Preparation", "O", 1, None, None),
            ("TX", "Special Handling Requirements", "O", 1, None, None),
            ("CQ", "Normal Collection Volume", "O", 1, None, None),
            ("CQ", "Minimum Collection Volume", "O", 1, None, None),
            ("TX", "Specimen Requirements", "O", 1, None, None),
            ("ID", "Specimen Priorities", "O", 0, None, "0027"),
            ("CQ", "Specimen Retention Time", "O", 1, None, None),
        ),
    ),
    "OM5": (
        "Observation Batteries (Sets)",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            (
                "CE",
                "Tests Observations Included Within An Ordered Test Battery",
                "O",
                0,
                None,
                None,
            ),
            ("ST", "Observation ID Suffixes", "O", 1, None, None),
        ),
    ),
    "OM6": (
        "Observations that are Calculated from Other Observations",
        (
            ("ST", "Segment Type ID", "O", 1, None, None),
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("TX", "Derivation Rule", "O", 1, None, None),
        ),
    ),
    "ORC": (
        "Common order",
        (
            ("ID", "Order control", "R", 1, 2, "0119"),
            ("CM_PLACER", "Placer Order Number", "O", 1, None, None),
            ("CM_FILLER", "Filler Order Number", "O", 1, None, None),
            ("CM_GROUP_ID", "Placer Group Number", "O", 1, None, None),
            ("ID", "Order status", "O", 1, 2, "0038"),
            ("ID", "Response flag", "O", 1, 1, "0121"),
            ("TQ", "Quantity / timing", "O", 0, 200, None),
            ("CM_EIP", "Parent", "O", 1, None, None),
            ("TS", "Date / time of transaction", "O", 1, 26, None),
            ("CN", "Entered by", "O", 1, 80, None),
            ("CN", "Verified by", "O", 1, 80, None),
            ("CN", "Ordering provider", "O", 1, 80, None),
            ("CM_PARENT_RESULT", "Enterer S Location", "O", 1, None, None),
            ("TN", "Call back phone number", "O", 0, 40, None),
            ("TS", "Order effective date / time", "O", 1, 26, None),
            ("CE", "Order control code reason", "O", 1, 200, None),
            ("CE", "Entering organization", "O", 1, 60, None),
            ("CE", "Entering device", "O", 1, 60, None),
            ("CN", "Action by", "O", 1, 80, None),
        ),
    ),
    "PID": (
        "Patient identification",
        (
            ("SI", "Set ID - Patient ID", "O", 1, 4, None),
            ("CM_PAT_ID", "Patient ID External ID", "O", 1, None, None),
            ("CM_PAT_ID", "Patient ID Internal ID", "R", 0, None, None),
            ("ST", "Alternate patient ID", "O", 1, 12, None),
            ("PN", "Patient name", "R", 1, 48, None),
            ("ST", "Mother's maiden name", "O", 1, 30, None),
            ("TS", "Date of birth", "O", 1, 26, None),
            ("ID", "Sex", "O", 1, 1, "0001"),
            ("PN", "Patient alias", "O", 0, 48, None),
            ("ID", "Race", "O", 1, 1, "0005"),
            ("AD", "Patient address", "O", 0, 106, None),
            ("ID", "County code", "O", 1, 4, None),
            ("TN", "Phone number - home", "O", 0, 40, None),
            ("TN", "Phone number - business", "O", 0, 40, None),
            ("ST", "Language - patient", "O", 1, 25, None),
            ("ID", "Marital status", "O", 1, 1, "0002"),
            ("ID", "Religion", "O", 1, 3, "0006"),
            ("CM_PAT_ID", "Patient Account Number", "O", 1, None, None),
            ("ST", "Social security number - patient", "O", 1, 16, None),
            ("CM_LICENSE_NO", "Driver S License Number Patient", "O", 1, None, None),
            ("CM_PAT_ID", "Mother S Identifier", "O", 1, None, None),
            ("ID", "Ethnic group", "O", 1, 1, "0189"),
            ("ST", "Birth place", "O", 1, 60, None),
            ("ID", "Multiple birth indicator", "O", 1, 2, "0136"),
            ("NM", "Birth order", "O", 1, 2, None),
            ("ID", "Citizenship", "O", 0, 3, "0171"),
            ("ST", "Veterans military status", "O", 1, 60, "0172"),
        ),
    ),
    "PR1": (
        "Procedures",
        (
            ("SI", "Set ID - procedure", "R", 1, 4, None),
            ("ID", "Procedure coding method", "R", 0, 2, "0089"),
            ("ID", "Procedure code", "R", 0, 10, "0088"),
            ("ST", "Procedure description", "O", 0, 40, None),
            ("TS", "Procedure date / time", "R", 1, 26, None),
            ("ID", "Procedure type", "R", 1, 2, "0090"),
            ("NM", "Procedure minutes", "O", 1, 4, None),
            ("CN", "Anesthesiologist", "O", 1, 60, "0010"),
            ("ID", "Anesthesia code", "O", 1, 2, "0019"),
            ("NM", "Anesthesia minutes", "O", 1, 4, None),
            ("CN", "Surgeon", "O", 1, 60, "0010"),
            ("CM_PRACTITIONER", "Procedure Practitioner", "O", 0, None, "0010"),
            ("ID", "Consent code", "O", 1, 2, "0059"),
            ("NM", "Procedure priority", "O", 1, 2, None),
        ),
    ),
    "PRA": (
        "Practitioner Detail",
        (
            ("ST", "Pra Primary Key Value", "R", 1, None, None),
            ("CE", "Practitioner Group", "O", 0, None, None),
            ("ID", "Practitioner Category", "O", 0, None, "0186"),
            ("ID", "Provider Billing", "O", 1, None, "0187"),
            ("CM_SPD", "Specialty", "O", 0, None, None),
            ("CM_PLN", "Practitioner ID Numbers", "O", 0, None, None),
            ("CM_PIP", "Privileges", "O", 0, None, None),
        ),
    ),
    "PV1": (
        "Patient visit",
        (
            ("SI", "Set ID - Patient visit", "O", 1, 4, None),
            ("ID", "Patient class", "R", 1, 1, "0004"),
            ("CM_INTERNAL_LOCATION", "Assigned Patient Location", "O", 1, None, "0079"),
            ("ID", "Admission type", "O", 1, 2, "0007"),
            ("ST", "Preadmit number", "O", 1, 20, None),
            ("CM_INTERNAL_LOCATION", "Prior Patient Location", "O", 1, None, None),
            ("CN", "Attending doctor", "O", 1, 60, "0010"),
            ("CN", "Referring doctor", "O", 1, 60, "0010"),
            ("CN", "Consulting doctor", "O", 0, 60, "0010"),
            ("ID", "Hospital service", "O", 1, 3, "0069"),
            ("CM_INTERNAL_LOCATION", "Temporary Location", "O", 1, None, "0079"),
            ("ID", "Preadmit test indicator", "O", 1, 2, "0087"),
            ("ID", "Readmission indicator", "O", 1, 2, "0092"),
            ("ID", "Admit source", "O", 1, 3, "0023"),
            ("ID", "Ambulatory status", "O", 0, 2, "0009"),
            ("ID", "VIP indicator", "O", 1, 2, "0099"),
            ("CN", "Admitting doctor", "O", 1, 60, "0010"),
            ("ID", "Patient type", "O", 1, 2, "0018"),
            ("CM_PAT_ID", "Visit Number", "O", 1, None, None),
            ("CM_FINANCE", "Financial Class", "O", 0, None, "0064"),
            ("ID", "Charge price indicator", "O", 1, 2, "0032"),
            ("ID", "Courtesy code", "O", 1, 2, "0045"),
            ("ID", "Credit rating", "O", 1, 2, "0046"),
            ("ID", "Contract code", "O", 0, 2, "0044"),
            ("DT", "Contract effective date", "O", 0, 8, None),
            ("NM", "Contract amount", "O", 0, 12, None),
            ("NM", "Contract period", "O", 0, 3, None),
            ("ID", "Interest code", "O", 1, 2, "0073"),
            ("ID", "Transfer to bad debt code", "O", 1, 1, "0110"),
            ("DT", "Transfer to bad debt date", "O", 1, 8, None),
            ("ID", "Bad debt agency code", "O", 1, 10, "0021"),
            ("NM", "Bad debt transfer amount", "O", 1, 12, None),
            ("NM", "Bad debt recovery amount", "O", 1, 12, None),
            ("ID", "Delete account indicator", "O", 1, 1, "0111"),
            ("DT", "Delete account date", "O", 1, 8, None),
            ("ID", "Discharge disposition", "O", 1, 3, "0112"),
            ("CM_DLD", "Discharged To Location", "O", 1, None, "0113"),
            ("ID", "Diet type", "O", 1, 2, "0114"),
            ("ID", "Servicing facility", "O", 1, 2, "0115"),
            ("ID", "Bed status", "O", 1, 1, "0116"),
            ("ID", "Account status", "O", 1, 2, "0117"),
            ("CM_INTERNAL_LOCATION", "Pending Location", "O", 1, None, None),
            ("CM_INTERNAL_LOCATION", "Prior Temporary Location", "O", 1, None, None),
            ("TS", "Admit date / time", "O", 1, 26, None),
            ("TS", "Discharge date / time", "O", 1, 26, None),
            ("NM", "Current patient balance", "O", 1, 12, None),
            ("NM", "Total charges", "O", 1, 12, None),
            ("NM", "Total adjustments", "O", 1, 12, None),
            ("NM", "Total payments", "O", 1, 12, None),
            ("CM_PAT_ID_0192", "Alternate Visit ID", "O", 1, None, None),
        ),
    ),
    "PV2": (
        "Patient visit - additional information",
        (
            ("CM_INTERNAL_LOCATION", "Prior Pending Location", "O", 1, None, None),
            ("CE", "Accommodation code", "O", 1, 60, "0129"),
            ("CE", "Admit reason", "O", 1, 60, None),
            ("CE", "Transfer reason", "O", 1, 60, None),
            ("ST", "Patient valuables", "O", 0, 25, None),
            ("ST", "Patient valuables location", "O", 1, 25, None),
            ("ID", "Visit user code", "O", 1, 2, "0130"),
            ("DT", "Expected Admit Date", "O", 1, None, None),
            ("DT", "Expected Discharge Date", "O", 1, None, None),
        ),
    ),
    "QRD": (
        "Original-Style Query Definition",
        (
            ("TS", "Query Date Time", "R", 1, None, None),
            ("ID", "Query Format Code", "R", 1, None, "0106"),
            ("ID", "Query Priority", "R", 1, None, "0091"),
            ("ST", "Query ID", "R", 1, None, None),
            ("ID", "Deferred Response Type", "O", 1, None, "0107"),
            ("TS", "Deferred Response Date Time", "O", 1, None, None),
            ("CQ", "Quantity Limited Request", "R", 1, None, "0126"),
            ("ST", "Who Subject Filter", "R", 0, None, None),
            ("ID", "What Subject Filter", "R", 0, None, "0048"),
            ("ST", "What Department Data Code", "R", 0, None, None),
            ("CM_VR", "What Data Code Value Qualifier", "O", 0, None, None),
            ("ID", "Query Results Level", "O", 1, None, "0108"),
        ),
    ),
    "QRF": (
        "Original Style Query Filter",
        (
            ("ST", "Where Subject Filter", "R", 0, None, None),
            ("TS", "When Data Start Date Time", "O", 1, None, None),
            ("TS", "When Data End Date Time", "O", 1, None, None),
            ("ST", "What User Qualifier", "O", 0, None, None),
            ("ST", "Other Qry Subject Filter", "O", 0, None, None),
            ("ID", "Which Date Time Qualifier", "O", 0, None, "0156"),
            ("ID", "Which Date Time Status Qualifier", "O", 0, None, "0157"),
            ("ID", "Date Time Selection Qualifier", "O", 0, None, "0158"),
        ),
    ),
    "RQ1": (
        "Requisition Detail-1",
        (
            ("SI", "Anticipated Price", "O", 1, None, None),
            ("CE", "Manufacturer ID", "O", 1, None, None),
            ("ST", "Manufacturer S Catalog", "O", 1, None, None),
            ("CE", "Vendor ID", "O", 1, None, None),
            ("ST", "Vendor Catalog", "O", 1, None, None),
            ("ID", "Taxable", "O", 1, None, "0136"),
            ("ID", "Substitute Allowed", "O", 1, None, "0136"),
        ),
    ),
    "RQD": (
        "Requisition Detail",
        (
            ("SI", "Requisition Line Number", "O", 1, None, None),
            ("CE", "Item Code Internal", "O", 1, None, None),
            ("CE", "Item Code External", "O", 1, None, None),
            ("CE", "Hospital Item Code", "O", 1, None, None),
            ("NM", "Requisition Quantity", "O", 1, None, None),
            ("CE", "Requisition Unit Of Measure", "O", 1, None, None),
            ("ID", "Department Cost Center", "O", 1, None, None),
            ("ID", "Item Natural Account Code", "O", 1, None, None),
            ("CE", "Deliver To ID", "O", 1, None, None),
            ("DT", "Date Needed", "O", 1, None, None),
        ),
    ),
    "RXA": (
        "Pharmacy/Treatment Administration",
        (
            ("NM", "Give Sub ID Counter", "R", 1, None, None),
            ("NM", "Administration Sub ID Counter", "R", 1, None, None),
            ("TS", "Date Time Start Of Administration", "R", 1, None, None),
            ("TS", "Date Time End Of Administration", "R", 1, None, None),
            ("CE", "Administered Code", "R", 1, None, None),
            ("NM", "Administered Amount", "R", 1, None, None),
            ("CE", "Administered Units", "O", 1, None, None),
            ("CE", "Administered Dosage Form", "O", 1, None, None),
            ("ST", "Administration Notes", "O", 1, None, None),
            ("CN", "Administering Provider", "O", 1, None, None),
            ("CM_LA1", "Administered At Location", "O", 1, None, None),
            ("ST", "Administered Per Time Unit", "O", 1, None, None),
        ),
    ),
    "RXC": (
        "Pharmacy/Treatment Component Order",
        (
            ("ID", "Rx Component Type", "R", 1, None, "0166"),
            ("CE", "Component Code", "R", 1, None, None),
            ("NM", "Component Amount", "R", 1, None, None),
            ("CE", "Component Units", "R", 1, None, None),
        ),
    ),
    "RXD": (
        "Pharmacy/Treatment Dispense",
        (
            ("NM", "Dispense Sub ID Counter", "O", 1, None, None),
            ("CE", "Dispense Give Code", "R", 1, None, None),
            ("TS", "Date Time Dispensed", "O", 1, None, None),
            ("NM", "Actual Dispense Amount", "R", 1, None, None),
            ("CE", "Actual Dispense Units", "O", 1, None, None),
            ("CE", "Actual Dosage Form", "O", 1, None, None),
            ("ST", "Prescription Number", "R", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("ST", "Dispense Notes", "O", 0, None, None),
            ("CN", "Dispensing Provider", "O", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("CM_LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, None),
            ("CE", "Pharmacy Special Dispensing Instructions", "O", 1, None, None),
        ),
    ),
    "RXE": (
        "Pharmacy/Treatment Encoded Order",
        (
            ("TQ", "Quantity Timing", "O", 0, None, None),
            ("CE", "Give Code", "R", 1, None, None),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CE", "Give Units", "R", 1, None, None),
            ("CE", "Give Dosage Form", "O", 1, None, None),
            ("CE", "Provider S Administration Instructions", "O", 0, None, None),
            ("CM_LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("NM", "Dispense Amount", "O", 1, None, None),
            ("CE", "Dispense Units", "O", 1, None, None),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("CN", "Ordering Provider S DEA Number", "O", 1, None, None),
            ("CN", "Pharmacist Verifier ID", "O", 1, None, None),
            ("ST", "Prescription Number", "R", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("NM", "Number Of Refills Doses Dispensed", "O", 1, None, None),
            (
                "TS",
                "Date Time Of Most Recent Refill Or Dose Dispensed",
                "O",
                1,
                None,
                None,
            ),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, None),
            ("CE", "Pharmacy Special Dispensing Instructions", "O", 1, None, None),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("CE", "Give Rate Amount", "O", 1, None, None),
            ("CE", "Give Rate Units", "O", 1, None, None),
        ),
    ),
    "RXG": (
        "Pharmacy/Treatment Give",
        (
            ("NM", "Give Sub ID Counter", "R", 1, None, None),
            ("NM", "Dispense Sub ID Counter", "O", 1, None, None),
            ("TQ", "Quantity Timing", "O", 0, None, None),
            ("CE", "Give Code", "R", 1, None, None),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CE", "Give Units", "R", 1, None, None),
            ("CE", "Give Dosage Form", "O", 1, None, None),
            ("ST", "Administration Notes", "O", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("CM_LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, None),
            ("CE", "Pharmacy Special Administration Instructions", "O", 0, None, None),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("CE", "Give Rate Amount", "O", 1, None, None),
            ("CE", "Give Rate Units", "O", 1, None, None),
        ),
    ),
    "RXO": (
        "Pharmacy/Treatment Order",
        (
            ("CE", "Requested Give Code", "R", 1, None, None),
            ("NM", "Requested Give Amount Minimum", "R", 1, None, None),
            ("NM", "Requested Give Amount Maximum", "O", 1, None, None),
            ("CE", "Requested Give Units", "R", 1, None, None),
            ("CE", "Requested Dosage Form", "O", 1, None, None),
            ("CE", "Provider S Pharmacy Instructions", "O", 0, None, None),
            ("CE", "Provider S Administration Instructions", "O", 0, None, None),
            ("CM_LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Allow Substitutions", "O", 1, None, "0161"),
            ("CE", "Requested Dispense Code", "O", 1, None, None),
            ("NM", "Requested Dispense Amount", "O", 1, None, None),
            ("CE", "Requested Dispense Units", "O", 1, None, None),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("CN", "Ordering Provider S DEA Number", "O", 1, None, None),
            ("CN", "Pharmacist Verifier ID", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, None),
            ("ST", "Requested Give Per Time Unit", "O", 1, None, None),
        ),
    ),
    "RXR": (
        "Pharmacy/Treatment Route",
        (
            ("CE", "Route", "R", 1, None, "0162"),
            ("CE", "Site", "O", 1, None, "0163"),
            ("CE", "Administration Device", "O", 1, None, "0164"),
            ("CE", "Administration Method", "O", 1, None, "0165"),
        ),
    ),
    "STF": (
        "Staff Identification",
        (
            ("CE", "Stf Primary Key Value", "R", 1, None, None),
            ("CE", "Staff ID Code", "O", 0, None, None),
            ("PN", "Staff Name", "O", 1, None, None),
            ("ID", "Staff Type", "O", 0, None, "0182"),
            ("ID", "Sex", "O", 1, None, "0001"),
            ("TS", "Date Of Birth", "O", 1, None, None),
            ("ID", "Active Inactive", "O", 1, None, "0183"),
            ("CE", "Department", "O", 0, None, "0184"),
            ("CE", "Service", "O", 0, None, None),
            ("TN", "Phone", "O", 0, None, None),
            ("AD", "Office Home Address", "O", 0, None, None),
            ("CM_DIN", "Activation Date", "O", 0, None, None),
            ("CM_DIN", "Inactivation Date", "O", 0, None, None),
            ("CE", "Backup Person ID", "O", 0, None, None),
            ("ST", "E Mail Address", "O", 0, None, None),
            ("ID", "Preferred Method Of Contact", "O", 1, None, "0185"),
        ),
    ),
    "UB1": (
        "UB82 data",
        (
            ("SI", "Set ID - UB82", "O", 1, 4, None),
            ("NM", "Blood deductible (43)", "O", 1, 1, "0136"),
            ("NM", "Blood furnished-pints of (40)", "O", 1, 2, None),
            ("NM", "Blood replaced-pints (41)", "O", 1, 2, None),
            ("NM", "Blood not replaced-pints (42)", "O", 1, 2, None),
            ("NM", "Co-insurance days (25)", "O", 1, 2, None),
            ("ID", "Condition code (35-39)", "O", 0, 14, "0043"),
            ("NM", "Covered days (23)", "O", 1, 3, None),
            ("NM", "Non-covered days (24)", "O", 1, 3, None),
            ("CM_UVC", "Value Amount And Code 46 49", "O", 0, None, "0153"),
            ("NM", "Number of grace days (90)", "O", 1, 2, None),
            ("ID", "Special program indicator (44)", "O", 1, 2, "0348"),
            ("ID", "PSRO / UR approval indicator (87)", "O", 1, 1, "0349"),
            ("DT", "PSRO / UR approved stay - from (88)", "O", 1, 8, None),
            ("DT", "PSRO / UR approved stay - to (89)", "O", 1, 8, None),
            ("CM_OCD", "Occurrence 28 32", "O", 0, None, None),
            ("ID", "Occurrence span (33)", "O", 1, 2, "0351"),
            ("DT", "Occurrence span start date (33)", "O", 1, 8, None),
            ("DT", "Occurrence span end date (33)", "O", 1, 8, None),
            ("ST", "UB-82 locator 2", "O", 1, 30, None),
            ("ST", "UB-82 locator 9", "O", 1, 7, None),
            ("ST", "UB-82 locator 27", "O", 1, 8, None),
            ("ST", "UB-82 locator 45", "O", 1, 17, None),
        ),
    ),
    "UB2": (
        "UB92 data",
        (
            ("SI", "Set ID - UB92", "O", 1, 4, None),
            ("ST", "Co-insurance days (9)", "O", 1, 3, None),
            ("ID", "Condition code (24-30)", "O", 0, 2, "0043"),
            ("ST", "Covered days (7)", "O", 1, 3, None),
            ("ST", "Non-covered days (8)", "O", 1, 4, None),
            ("CM_UVC", "Value Amount And Code 39 41", "O", 0, None, None),
            ("CM_OCD", "Occurrence Code And Date 32 35", "O", 0, None, None),
            ("CM_OSP", "Occurrence Span Code Dates 36", "O", 0, None, None),
            ("ST", "UB92 locator 2 (state)", "O", 0, 29, None),
            ("ST", "UB92 locator 11 (state)", "O", 0, 12, None),
            ("ST", "UB92 locator 31 (national)", "O", 1, 5, None),
            ("ST", "Document control number", "O", 0, 23, None),
            ("ST", "UB92 locator 49 (national)", "O", 0, 4, None),
            ("ST", "UB92 locator 56 (state)", "O", 0, 14, None),
            ("ST", "UB92 locator 57 (national)", "O", 1, 27, None),
            ("ST", "UB92 locator 78 (state)", "O", 0, 2, None),
        ),
    ),
    "URD": (
        "Results/Update Definition",
        (
            ("TS", "R U Date Time", "O", 1, None, None),
            ("ID", "Report Priority", "O", 1, None, "0109"),
            ("ST", "R U Who Subject Definition", "R", 0, None, None),
            ("ID", "R U What Subject Definition", "O", 0, None, "0048"),
            ("ST", "R U What Department Code", "O", 0, None, None),
            ("ST", "R U Display Print Locations", "O", 0, None, None),
            ("ID", "R U Results Level", "O", 1, None, "0108"),
        ),
    ),
    "URS": (
        "Unsolicited Selection",
        (
            ("ST", "R U Where Subject Definition", "R", 0, None, None),
            ("TS", "R U When Data Start Date Time", "O", 1, None, None),
            ("TS", "R U When Data End Date Time", "O", 1, None, None),
            ("ST", "R U What User Qualifier", "O", 0, None, None),
            ("ST", "R U Other Results Subject Definition", "O", 0, None, None),
            ("ID", "R U Which Date Time Qualifier", "O", 0, None, "0156"),
            ("ID", "R U Which Date Time Status Qualifier", "O", 0, None, "0157"),
            ("ID", "R U Date Time Selection Qualifier", "O", 0, None, "0158"),
        ),
    ),
}
