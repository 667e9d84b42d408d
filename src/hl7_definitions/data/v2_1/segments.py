# src/hl7_definitions/data/v2_1/segments.py
"""HL7 v2.1 segment definitions."""

SEGMENTS = {
    "ACC": (
        "Accident",
        (
            ("TS", "Accident Date Time", "O", 1, None, None),
            ("ID", "Accident Code", "O", 1, None, None),
            ("ST", "Accident Location", "O", 1, None, None),
        ),
    ),
    "ADD": ("Addendum", (("ST", "Addendum Continuation Pointer", "O", 1, None, None),)),
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
            ("CM", "When To Charge", "O", 1, None, None),
            ("ID", "Charge Type", "O", 1, None, None),
            ("CM", "Account ID", "O", 1, None, None),
        ),
    ),
    "BTS": (
        "Batch Trailer",
        (
            ("ST", "Batch Message Count", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("CM", "Batch Totals", "O", 1, None, None),
        ),
    ),
    "DG1": (
        "Diagnosis",
        (
            ("SI", "Set ID - diagnosis", "R", 1, 4, None),
            ("ID", "Diagnosis coding method", "R", 1, 2, "0053"),
            ("ID", "Diagnosis code", "O", 1, 8, "0051"),
            ("ST", "Diagnosis description", "O", 1, 40, None),
            ("TS", "Diagnosis date / time", "O", 1, 19, None),
            ("ID", "Diagnosis / DRG type", "R", 1, 2, "0052"),
            ("ST", "Major diagnostic category", "O", 1, 4, "0118"),
            ("ID", "Diagnostic related group", "O", 1, 4, "0055"),
            ("ID", "DRG approval indicator", "O", 1, 2, None),
            ("ID", "DRG grouper review code", "O", 1, 2, "0056"),
            ("ID", "Outlier type", "O", 1, 2, "0083"),
            ("NM", "Outlier days", "O", 1, 3, None),
            ("NM", "Outlier cost", "O", 1, 12, None),
            ("ST", "Grouper version and type", "O", 1, 4, None),
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
    "ERR": ("Error", (("ID", "Error Code And Location", "R", 0, None, None),)),
    "EVN": (
        "Event type",
        (
            ("ID", "Event type code", "R", 1, 3, "0003"),
            ("TS", "Date / time of event", "R", 1, 19, None),
            ("TS", "Date / time planned event", "O", 1, 19, None),
            ("ID", "Event reason code", "O", 1, 3, "0062"),
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
            ("ID", "Transaction Type", "R", 1, None, None),
            ("ID", "Transaction Code", "R", 1, None, None),
            ("ST", "Transaction Description", "O", 1, None, None),
            ("ST", "Transaction Description Alt", "O", 1, None, None),
            ("NM", "Transaction Amount Extended", "O", 1, None, None),
            ("NM", "Transaction Quantity", "O", 1, None, None),
            ("NM", "Transaction Amount Unit", "O", 1, None, None),
            ("ST", "Department Code", "O", 1, None, None),
            ("ID", "Insurance Plan ID", "R", 1, None, None),
            ("NM", "Insurance Amount", "O", 1, None, None),
            ("ST", "Patient Location", "O", 1, None, None),
            ("ID", "Fee Schedule", "O", 1, None, None),
            ("ID", "Patient Type", "O", 1, None, None),
            ("ID", "Diagnosis Code", "O", 1, None, None),
            ("CN", "Performed By Code", "O", 1, None, None),
            ("CN", "Ordered By Code", "O", 1, None, None),
            ("NM", "Unit Cost", "O", 1, None, None),
        ),
    ),
    "FTS": (
        "File Trailer",
        (
            ("ST", "File Batch Count", "O", 1, None, None),
            ("ST", "File Trailer Comment", "O", 1, None, None),
        ),
    ),
    "GT1": (
        "Guarantor",
        (
            ("SI", "Set ID Guarantor", "R", 1, None, None),
            ("ID", "Guarantor Number", "O", 1, None, None),
            ("PN", "Guarantor Name", "R", 1, None, None),
            ("PN", "Guarantor Spouse Name", "O", 1, None, None),
            ("AD", "Guarantor Address", "O", 1, None, None),
            ("TN", "Guarantor Phone Number Home", "O", 1, None, None),
            ("TN", "Guarantor Phone Number Business", "O", 1, None, None),
            ("DT", "Guarantor Date Of Birth", "O", 1, None, None),
            ("ID", "Guarantor Sex", "O", 1, None, None),
            ("ID", "Guarantor Type", "O", 1, None, None),
            ("ID", "Guarantor Relationship", "O", 1, None, None),
            ("ST", "Guarantor SSN", "O", 1, None, None),
            ("DT", "Guarantor Date Begin", "O", 1, None, None),
            ("DT", "Guarantor Date End", "O", 1, None, None),
            ("NM", "Guarantor Priority", "O", 1, None, None),
            ("ST", "Guarantor Employer Name", "O", 1, None, None),
            ("AD", "Guarantor Employer Address", "O", 1, None, None),
            ("TN", "Guarantor Employ Phone Number", "O", 1, None, None),
            ("ST", "Guarantor Employee ID Number", "O", 1, None, None),
            ("ID", "Guarantor Employment Status", "O", 1, None, None),
        ),
    ),
    "IN1": (
        "Insurance",
        (
            ("SI", "Set ID Insurance", "R", 1, None, None),
            ("ID", "Insurance Plan ID", "R", 1, None, None),
            ("ST", "Insurance Company ID", "R", 1, None, None),
            ("ST", "Insurance Company Name", "O", 1, None, None),
            ("AD", "Insurance Company Address", "O", 1, None, None),
            ("PN", "Insurance Company Contact Pers", "O", 1, None, None),
            ("TN", "Insurance Company Phone Number", "O", 1, None, None),
            ("ST", "Group Number", "O", 1, None, None),
            ("ST", "Group Name", "O", 1, None, None),
            ("ST", "Insured S Group Employer ID", "O", 1, None, None),
            ("ST", "Insured S Group Employer Name", "O", 1, None, None),
            ("DT", "Plan Effective Date", "O", 1, None, None),
            ("DT", "Plan Expiration Date", "O", 1, None, None),
            ("ST", "Authorization Information", "O", 1, None, None),
            ("ID", "Plan Type", "O", 1, None, None),
            ("PN", "Name Of Insured", "O", 1, None, None),
            ("ID", "Insured S Relationship To Patient", "O", 1, None, None),
            ("DT", "Insured S Date Of Birth", "O", 1, None, None),
            ("AD", "Insured S Address", "O", 1, None, None),
            ("ID", "Assignment Of Benefits", "O", 1, None, None),
            ("ID", "Coordination Of Benefits", "O", 1, None, None),
            ("ST", "Coordination Of Benefits Priority", "O", 1, None, None),
            ("ID", "Notice Of Admission Code", "O", 1, None, None),
            ("DT", "Notice Of Admission Date", "O", 1, None, None),
            ("ID", "Report Of Eligibility Code", "O", 1, None, None),
            ("DT", "Report Of Eligibility Date", "O", 1, None, None),
            ("ID", "Release Information Code", "O", 1, None, None),
            ("ST", "Pre Admit Certification Pac", "O", 1, None, None),
            ("DT", "Verification Date", "O", 1, None, None),
            ("CM", "Verification By", "O", 1, None, None),
            ("ID", "Type Of Agreement Code", "O", 1, None, None),
            ("ID", "Billing Status", "O", 1, None, None),
            ("NM", "Lifetime Reserve Days", "O", 1, None, None),
            ("NM", "Delay Before Lifetime Reserve Days", "O", 1, None, None),
            ("ST", "Company Plan Code", "O", 1, None, None),
            ("ST", "Policy Number", "O", 1, None, None),
            ("NM", "Policy Deductible", "O", 1, None, None),
            ("NM", "Policy Limit Amount", "O", 1, None, None),
            ("NM", "Policy Limit Days", "O", 1, None, None),
            ("NM", "Room Rate Semi Private", "O", 1, None, None),
            ("NM", "Room Rate Private", "O", 1, None, None),
            ("ID", "Insured S Employment Status", "O", 1, None, None),
            ("ID", "Insured S Sex", "O", 1, None, None),
            ("AD", "Insured S Employer Address", "O", 1, None, None),
        ),
    ),
    "MRG": (
        "Merge Patient Information",
        (
            ("CK", "Prior Patient ID Internal", "R", 1, None, None),
            ("CK", "Prior Alternate Patient ID", "O", 1, None, None),
            ("CK", "Prior Patient Account Number", "O", 1, None, None),
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
            ("TS", "Date / Time of message", "O", 1, 19, None),
            ("ST", "Security", "O", 1, 40, None),
            ("CM_MSG", "Message Type", "R", 1, None, None),
            ("ST", "Message control ID", "R", 1, 20, None),
            ("ID", "Processing ID", "R", 1, 1, "0103"),
            ("NM", "Version ID", "R", 1, 8, "0104"),
            ("NM", "Sequence number", "O", 1, 15, None),
            ("ST", "Continuation pointer", "O", 1, 180, None),
        ),
    ),
    "NCK": ("System Clock", (("TS", "System Date Time", "R", 1, None, None),)),
    "NK1": (
        "Next of kin",
        (
            ("SI", "Set ID - Next of kin", "R", 1, 4, None),
            ("PN", "Name", "O", 1, 48, None),
            ("ST", "Relationship", "O", 1, 15, None),
            ("AD", "Address", "O", 1, 106, None),
            ("TN", "Phone number", "O", 0, 40, None),
        ),
    ),
    "NPU": (
        "Bed Status Update",
        (
            ("ID", "Bed Location", "R", 1, None, None),
            ("ID", "Bed Status", "O", 1, None, None),
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
            ("ID", "Statistics Available", "R", 1, None, None),
            ("ST", "Source Identifier", "O", 1, None, None),
            ("ID", "Source Type", "O", 1, None, None),
            ("TS", "Statistics Start", "O", 1, None, None),
            ("TS", "Statistics End", "O", 1, None, None),
            ("NM", "Receive Character Count", "O", 1, None, None),
            ("NM", "Send Character Count", "O", 1, None, None),
            ("NM", "Messages Received", "O", 1, None, None),
            ("NM", "Messages Sent", "O", 1, None, None),
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
            ("TX", "Comment", "R", 0, 120, None),
        ),
    ),
    "OBR": (
        "Observation request",
        (
            ("SI", "Set ID - observation request", "O", 1, 4, None),
            ("CM", "Placer order number", "O", 1, 75, None),
            ("CM", "Filler order number", "O", 1, 75, None),
            ("CE", "Universal service ID", "R", 1, 200, None),
            ("ST", "Priority", "O", 1, None, None),
            ("TS", "Requested date / time", "O", 1, 19, None),
            ("TS", "Observation date / time", "R", 1, 19, None),
            ("TS", "Observation end date / time", "R", 1, 19, None),
            ("CQ", "Collection volume", "R", 1, 20, None),
            ("CN", "Collector identifier", "O", 0, 60, None),
            ("ST", "Specimen Action Code", "O", 1, None, None),
            ("CM", "Danger Code", "O", 1, None, None),
            ("ST", "Relevant clinical information", "O", 1, 300, None),
            ("TS", "Specimen received date / time", "R", 1, 19, None),
            ("CM", "Specimen source", "O", 1, 300, "0070"),
            ("CN", "Ordering provider", "O", 0, 80, None),
            ("TN", "Order call-back phone number", "O", 0, 40, None),
            ("ST", "Placer field 1", "O", 1, 60, None),
            ("ST", "Placer field 2", "O", 1, 60, None),
            ("ST", "Filler field 1", "O", 1, 60, None),
            ("ST", "Filler field 2", "O", 1, 60, None),
            ("TS", "Results report / status change - date / time", "R", 1, 19, None),
            ("CM", "Charge to practice", "O", 1, 40, None),
            ("ID", "Diagnostic service section ID", "O", 1, 10, "0074"),
            ("ID", "Result status", "O", 1, 1, "0123"),
            ("CM", "Parent result", "O", 1, 200, None),
            ("CM", "Quantity Timing", "O", 0, None, None),
            ("CN", "Result copies to", "O", 0, 150, None),
            ("CM", "Parent number", "O", 1, 150, None),
            ("ID", "Transportation mode", "O", 1, 20, "0124"),
            ("CE", "Reason for study", "O", 0, 300, None),
            ("CN", "Principal Result Interpreter", "O", 1, None, None),
            ("CN", "Assistant Result Interpreter", "O", 1, None, None),
            ("CN", "Technician", "O", 1, None, None),
            ("CN", "Transcriptionist", "O", 1, None, None),
            ("TS", "Scheduled Date Time", "O", 1, None, None),
        ),
    ),
    "OBX": (
        "Observation / result",
        (
            ("SI", "Set ID - observational simple", "O", 1, 10, None),
            ("ID", "Value type", "O", 1, 2, "0125"),
            ("CE", "Observation identifier", "R", 1, 80, None),
            ("NM", "Observation Sub ID", "O", 1, None, None),
            ("varies", "Observation value", "O", 1, 65536, None),
            ("ID", "Units", "O", 1, None, None),
            ("ST", "References range", "O", 1, 60, None),
            ("ST", "Abnormal Flags", "O", 0, None, None),
            ("NM", "Probability", "O", 1, 5, None),
            ("ID", "Nature of abnormal test", "O", 1, 2, "0080"),
            ("ID", "Observation result status", "O", 1, 2, "0085"),
            ("TS", "Date last observation normal values", "O", 1, 19, None),
        ),
    ),
    "ORC": (
        "Common order",
        (
            ("ST", "Order Control", "R", 1, None, None),
            ("CM", "Placer order number", "O", 1, 75, None),
            ("CM", "Filler order number", "O", 1, 75, None),
            ("CM", "Placer group number", "O", 1, 75, None),
            ("ST", "Order Status", "O", 1, None, None),
            ("ST", "Response Flag", "O", 1, None, None),
            ("CM", "Timing Quantity", "O", 1, None, None),
            ("CM", "Parent", "O", 1, 200, None),
            ("TS", "Date / time of transaction", "O", 1, 19, None),
            ("CN", "Entered by", "O", 1, 80, None),
            ("CN", "Verified by", "O", 1, 80, None),
            ("CN", "Ordering provider", "O", 1, 80, None),
            ("CM", "Enterer's location", "O", 1, 80, None),
            ("TN", "Call back phone number", "O", 0, 40, None),
        ),
    ),
    "ORO": (
        "Order Other",
        (
            ("CE", "Order Item ID", "O", 1, None, None),
            ("ID", "Substitute Allowed", "O", 1, None, None),
            ("CN", "Results Copies To", "O", 0, None, None),
            ("ID", "Stocklocation", "O", 1, None, None),
        ),
    ),
    "PD1": (
        "Patient Additional Demographic",
        (("ST", "Living Dependency", "O", 1, None, None),),
    ),
    "PID": (
        "Patient identification",
        (
            ("SI", "Set ID - Patient ID", "O", 1, 4, None),
            ("CK", "Patient ID (External ID)", "O", 1, 16, None),
            ("CK", "Patient ID (Internal ID)", "R", 1, 16, None),
            ("ST", "Alternate patient ID", "O", 1, 12, None),
            ("PN", "Patient name", "R", 1, 48, None),
            ("ST", "Mother's maiden name", "O", 1, 30, None),
            ("DT", "Date Of Birth", "O", 1, None, None),
            ("ID", "Sex", "O", 1, 1, "0001"),
            ("PN", "Patient alias", "O", 0, 48, None),
            ("ID", "Race", "O", 1, 1, "0005"),
            ("AD", "Patient address", "O", 1, 106, None),
            ("ID", "County code", "O", 1, 4, None),
            ("TN", "Phone number - home", "O", 0, 40, None),
            ("TN", "Phone number - business", "O", 0, 40, None),
            ("ST", "Language - patient", "O", 1, 25, None),
            ("ID", "Marital status", "O", 1, 1, "0002"),
            ("ID", "Religion", "O", 1, 3, "0006"),
            ("CK", "Patient account number", "O", 1, 20, None),
            ("ST", "Social security number - patient", "O", 1, 16, None),
            ("CM", "Driver's license number - patient", "O", 1, 25, None),
        ),
    ),
    "PR1": (
        "Procedures",
        (
            ("SI", "Set ID Procedure", "R", 0, None, None),
            ("ID", "Procedure Coding Method", "R", 1, None, None),
            ("ID", "Procedure Code", "R", 1, None, None),
            ("ST", "Procedure Description", "O", 1, None, None),
            ("TS", "Procedure Date Time", "R", 1, None, None),
            ("ID", "Procedure Type", "R", 1, None, None),
            ("NM", "Procedure Minutes", "O", 1, None, None),
            ("CN", "Anesthesiologist", "O", 1, None, None),
            ("ID", "Anesthesia Code", "O", 1, None, None),
            ("NM", "Anesthesia Minutes", "O", 1, None, None),
            ("CN", "Surgeon", "O", 1, None, None),
            ("CN", "Resident Code", "O", 1, None, None),
            ("ID", "Consent Code", "O", 1, None, None),
        ),
    ),
    "PV1": (
        "Patient visit",
        (
            ("SI", "Set ID - Patient visit", "O", 1, 4, None),
            ("ID", "Patient class", "R", 1, 1, "0004"),
            ("ID", "Assigned Patient Location", "R", 1, None, None),
            ("ID", "Admission type", "O", 1, 2, "0007"),
            ("ST", "Preadmit number", "O", 1, 20, None),
            ("ID", "Prior Patient Location", "O", 1, None, None),
            ("CN", "Attending doctor", "O", 1, 60, "0010"),
            ("CN", "Referring doctor", "O", 1, 60, "0010"),
            ("CN", "Consulting doctor", "O", 0, 60, "0010"),
            ("ID", "Hospital service", "O", 1, 3, "0069"),
            ("ID", "Temporary Location", "O", 1, None, None),
            ("ID", "Preadmit test indicator", "O", 1, 2, "0087"),
            ("ID", "Readmission indicator", "O", 1, 2, "0092"),
            ("ID", "Admit source", "O", 1, 3, "0023"),
            ("ID", "Ambulatory status", "O", 1, 2, "0009"),
            ("ID", "VIP indicator", "O", 1, 2, "0099"),
            ("CN", "Admitting doctor", "O", 1, 60, "0010"),
            ("ID", "Patient type", "O", 1, 2, "0018"),
            ("NM", "Visit number", "O", 1, 15, None),
            ("ID", "Financial Class", "O", 0, None, None),
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
            ("ID", "Discharged To Location", "O", 1, None, None),
            ("ID", "Diet type", "O", 1, 2, "0114"),
            ("ID", "Servicing facility", "O", 1, 2, "0115"),
            ("ID", "Bed status", "O", 1, 1, "0116"),
            ("ID", "Account status", "O", 1, 2, "0117"),
            ("ID", "Pending Location", "O", 1, None, None),
            ("ID", "Prior Temporary Location", "O", 1, None, None),
            ("TS", "Admit date / time", "O", 1, 19, None),
            ("TS", "Discharge date / time", "O", 1, 19, None),
            ("NM", "Current Patient Balance", "O", 1, None, None),
            ("NM", "Total Charges", "O", 1, None, None),
            ("NM", "Total Adjustments", "O", 1, None, None),
            ("NM", "Total Payments", "O", 1, None, None),
        ),
    ),
    "QRD": (
        "Original-Style Query Definition",
        (
            ("TS", "Query Date Time", "R", 1, None, None),
            ("ID", "Query Format Code", "R", 1, None, None),
            ("ID", "Query Priority", "R", 1, None, None),
            ("ST", "Query ID", "R", 1, None, None),
            ("ID", "Deferred Response Type", "O", 1, None, None),
            ("TS", "Deferred Response Date Time", "O", 1, None, None),
            ("CQ", "Quantity Limited Request", "R", 1, None, None),
            ("ST", "Who Subject Filter", "R", 0, None, None),
            ("ID", "What Subject Filter", "R", 0, None, None),
            ("ST", "What Department Data Code", "R", 0, None, None),
            ("ST", "What Data Code Value Qualifier", "O", 0, None, None),
            ("ID", "Query Results Level", "O", 1, None, None),
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
        ),
    ),
    "RX1": (
        "Pharmacy Order",
        (
            ("ST", "Unused", "O", 1, None, None),
            ("ST", "Unused Number 2", "O", 1, None, None),
            ("ST", "Route", "O", 1, None, None),
            ("ST", "Site Administered", "O", 1, None, None),
            ("CQ", "Iv Evolution Rate", "O", 1, None, None),
            ("CQ", "Drug Strength", "O", 1, None, None),
            ("NM", "Final Concentration", "O", 1, None, None),
            ("NM", "Final Volume In Ml", "O", 1, None, None),
            ("CM", "Drug Dose", "O", 1, None, None),
            ("ID", "Drug Role", "O", 1, None, None),
            ("NM", "Prescription Sequence Number", "O", 1, None, None),
            ("CQ", "Quantity Dispensed", "O", 1, None, None),
            ("ST", "Unused Number 3", "O", 1, None, None),
            ("CE", "Drug ID", "O", 1, None, None),
            ("ID", "Component Drug Ids", "O", 0, None, None),
            ("ID", "Prescription Type", "O", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, None),
            ("ID", "Rx Order Status", "O", 1, None, None),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("ST", "Unused Number 4", "O", 1, None, None),
            ("NM", "Refills Remaining", "O", 1, None, None),
            ("ID", "DEA Class", "O", 1, None, None),
            ("NM", "Ordering Md S DEA Number", "O", 1, None, None),
            ("ST", "Unused Number 5", "O", 1, None, None),
            ("CE", "Last Refill Date Time", "O", 1, None, None),
            ("ST", "Rx Number", "O", 1, None, None),
            ("ID", "Prn Status", "O", 1, None, None),
            ("TX", "Pharmacy Instructions", "O", 0, None, None),
            ("TX", "Patient Instructions", "O", 0, None, None),
            ("TX", "Ce", "O", 0, None, None),
        ),
    ),
    "UB1": (
        "UB82",
        (
            ("SI", "Set ID UB82", "O", 1, None, None),
            ("ST", "Blood Deductible", "O", 1, None, None),
            ("ST", "Blood Furnished Pints Of 40", "O", 1, None, None),
            ("ST", "Blood Replaced Pints 41", "O", 1, None, None),
            ("ST", "Blood Not Replaced Pints 42", "O", 1, None, None),
            ("ST", "Co Insurance Days 25", "O", 1, None, None),
            ("ID", "Condition Code", "O", 0, None, None),
            ("ST", "Covered Days 23", "O", 1, None, None),
            ("ST", "Non Covered Days 24", "O", 1, None, None),
            ("CM", "Value Amount And Code 46 49", "O", 0, None, None),
            ("ST", "Number Of Grace Days 90", "O", 1, None, None),
            ("ID", "Special Program Indicator 44", "O", 1, None, None),
            ("ID", "PSRO UR Approval Indicator 87", "O", 1, None, None),
            ("DT", "PSRO UR Approved Stay From 88", "O", 1, None, None),
            ("DT", "PSRO UR Approved Stay To 89", "O", 1, None, None),
            ("CM", "Occurrence 28 32", "O", 0, None, None),
            ("ID", "Occurrence Span 33", "O", 1, None, None),
            ("DT", "Occurrence Span Start Date 33", "O", 1, None, None),
            ("DT", "Occurrence Span End Date 33", "O", 1, None, None),
            ("ST", "Ub 82 Locator 2", "O", 1, None, None),
            ("ST", "Ub 82 Locator 9", "O", 1, None, None),
            ("ST", "Ub 82 Locator 27", "O", 1, None, None),
            ("ST", "Ub 82 Locator 45", "O", 1, None, None),
        ),
    ),
    "URD": (
        "Results/Update Definition",
        (
            ("TS", "R U Date Time", "O", 1, None, None),
            ("ID", "Report Priority", "O", 1, None, None),
            ("ST", "R U Who Subject Definition", "R", 0, None, None),
            ("ID", "R U What Subject Definition", "O", 0, None, None),
            ("ST", "R U What Department Code", "O", 0, None, None),
            ("ST", "R U Display Print Locations", "O", 0, None, None),
            ("ID", "R U Results Level", "O", 1, None, None),
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
        ),
    ),
}
