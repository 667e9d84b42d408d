# src/hl7_definitions/data/v2_3_1/tables.py
"""HL7 v2.3.1 coded value tables."""

TABLES = {
    "0001": ("Sex", (("F", "Female"), ("M", "Male"), ("O", "Other"), ("U", "Unknown"))),
    "0002": (
        "Marital status",
        (
            ("A", "Separated"),
            ("D", "Divorced"),
            ("M", "Married"),
            ("S", "Single"),
            ("W", "Widowed"),
        ),
    ),
    "0003": (
        "Event type",
        (
            ("A01", "ADT/ACK - Admit/visit notification"),
            ("A02", "ADT/ACK - Transfer a patient"),
            ("A03", "ADT/ACK - Discharge/end visit"),
            ("A04", "ADT/ACK - Register a patient"),
            ("A05", "ADT/ACK - Pre-admit a patient"),
            ("A06", "ADT/ACK - Change an outpatient to an inpatient"),
            ("A07", "ADT/ACK - Change an inpatient to an outpatient"),
            ("A08", "ADT/ACK - Update patient information"),
            ("A09", "ADT/ACK - Patient departing - tracking"),
            ("A10", "ADT/ACK - Patient arriving - tracking"),
            ("A11", "ADT/ACK - Cancel admit/visit notification"),
            ("A12", "ADT/ACK - Cancel transfer"),
            ("A13", "ADT/ACK - Cancel discharge/end visit"),
            ("A14", "ADT/ACK - Pending admit"),
            ("A15", "ADT/ACK - Pending transfer"),
            ("A16", "ADT/ACK - Pending discharge"),
            ("A17", "ADT/ACK - Swap patients"),
            ("A18", "ADT/ACK - Merge patient information"),
            ("A19", "QRY/ADR - Patient query"),
            ("A20", "ADT/ACK - Bed status update"),
            ("A21", "ADT/ACK - Patient goes on a \"leave of absence\""),
            ("A22", "ADT/ACK - Patient returns from a \"leave of absence\""),
            ("A23", "ADT/ACK - Delete a patient record"),
            ("A24", "ADT/ACK - Link patient information"),
            ("A25", "ADT/ACK - Cancel pending discharge"),
            ("A26", "ADT/ACK - Cancel pending transfer"),
            ("A27", "ADT/ACK - Cancel pending admit"),
            ("A28", "ADT/ACK - Add person information"),
            ("A29", "ADT/ACK - Delete person information"),
            ("A30", "ADT/ACK - Merge person information"),
            ("A31", "ADT/ACK - Update person information"),
            ("A32", "ADT/ACK - Cancel patient arriving - tracking"),
            ("A33", "ADT/ACK - Cancel patient departing - tracking"),
            ("A34", "ADT/ACK - Merge patient information - patient ID only"),
            ("A35", "ADT/ACK - Merge patient information - account number only"),
            (
                "A36",
                "ADT/ACK - Merge patient information - patient ID and account number",
            ),
            ("A37", "ADT/ACK - Unlink patient information"),
            ("A38", "ADT/ACK - Cancel pre-admit"),
            ("A39", "ADT/ACK - Merge person - patient ID"),
            ("A40", "ADT/ACK - Merge patient - patient identifier list"),
            ("A41", "ADT/ACK - Merge account - patient account number"),
            ("A42", "ADT/ACK - Merge visit - visit number"),
            ("A43", "ADT/ACK - Move patient information - patient identifier list"),
            ("A44", "ADT/ACK - Move account information - patient account number"),
            ("A45", "ADT/ACK - Move visit information - visit number"),
            ("A46", "ADT/ACK - Change patient ID"),
            ("A47", "ADT/ACK - Change patient identifier list"),
            ("A48", "ADT/ACK - Change alternate patient ID"),
            ("A49", "ADT/ACK - Change patient account number"),
            ("A50", "ADT/ACK - Change visit number"),
            ("A51", "ADT/ACK - Change alternate visit ID"),
            ("C01", "CRM - Register a patient on a clinical trial"),
            (
                "C02",
                "CRM - Cancel a patient registration on clinical trial (for clerical mistakes only)",
            ),
            ("C03", "CRM - Correct/update registration information"),
            ("C04", "CRM - Patient has gone off a clinical trial"),
            ("C05", "CRM - Patient enters phase of clinical trial"),
            ("C06", "CRM - Cancel patient entering a phase (clerical mistake)"),
            ("C07", "CRM - Correct/update phase information"),
            ("C08", "CRM - Patient has gone off phase of clinical trial"),
            ("C09", "CSU - Automated time intervals for reporting, like monthly"),
            ("C10", "CSU - Patient completes the clinical trial"),
            ("C11", "CSU - Patient completes a phase of the clinical trial"),
            ("C12", "CSU - Update/correction of patient order/result information"),
            ("CNQ", "QRY/EQQ/VQQ/RQQ - Cancel query"),
            ("I01", "RQI/RPI - Request for insurance information"),
            ("I02", "RQI/RPL - Request/receipt of patient selection display list"),
            ("I03", "RQI/RPR - Request/receipt of patient selection list"),
            ("I04", "RQD/RPI - Request for patient demographic data"),
            ("I05", "RQC/RCI - Request for patient clinical information"),
            ("I06", "RQC/RCL - Request/receipt of clinical data listing"),
            ("I07", "PIN/ACK - Unsolicited insurance information"),
            ("I08", "RQA/RPA - Request for treatment authorization information"),
            ("I09", "RQA/RPA - Request for modification to an authorization"),
            ("I10", "RQA/RPA - Request for resubmission of an authorization"),
            ("I11", "RQA/RPA - Request for cancellation of an authorization"),
            ("I12", "REF/RRI - Patient referral"),
            ("I13", "REF/RRI - Modify patient referral"),
            ("I14", "REF/RRI - Cancel patient referral"),
            ("I15", "REF/RRI - Request patient referral status"),
            ("M01", "MFN/MFK - Master file not otherwise specified"),
            ("M02", "MFN/MFK - Master file - staff practitioner"),
            ("M03", "MFN/MFK - Master file - test/observation"),
            ("M04", "MFN/MFK - Master files charge description"),
            ("M05", "MFN/MFK - Patient location master file"),
            ("M06", "MFN/MFK - Clinical study with phases and schedules master file"),
            (
                "M07",
                "MFN/MFK - Clinical study without phases but with schedules master file",
            ),
            ("M08", "MFN/MFK - Test/observation (numeric) master file"),
            ("M09", "MFN/MFK - Test/observation (categorical) master file"),
            ("M10", "MFN/MFK - Test/observation batteries master file"),
            ("M11", "MFN/MFK - Test/calculated observations master file"),
            ("O01", "ORM - Order message (also RDE, RDS, RGV, RAS)"),
            ("O02", "ORR - Order response (also RRE, RRD, RRG, RRA)"),
            ("P01", "BAR/ACK - Add patient accounts"),
            ("P02", "BAR/ACK - Purge patient accounts"),
            ("P03", "DFT/ACK - Post detail financial transaction"),
            ("P04", "QRY/DSP - Generate bill and A/R statements"),
            ("P05", "BAR/ACK - Update account"),
            ("P06", "BAR/ACK - End account"),
            ("P07", "PEX - Unsolicited initial individual product experience report"),
            ("P08", "PEX - Unsolicited update individual product experience report"),
            ("P09", "SUR - Summary product experience report"),
            ("PC1", "PPR - PC/problem add"),
            ("PC2", "PPR - PC/problem update"),
            ("PC3", "PPR - PC/problem delete"),
            ("PC4", "QRY - PC/problem query"),
            ("PC5", "PRR - PC/problem response"),
            ("PC6", "PGL - PC/goal add"),
            ("PC7", "PGL - PC/goal update"),
            ("PC8", "PGL - PC/goal delete"),
            ("PC9", "QRY - PC/goal query"),
            ("PCA", "PPV - PC/goal response"),
            ("PCB", "PPP - PC/pathway (problem-oriented) add"),
            ("PCC", "PPP - PC/pathway (problem-oriented) update"),
            ("PCD", "PPP - PC/pathway (problem-oriented) delete"),
            ("PCE", "QRY - PC/pathway (problem-oriented) query"),
            ("PCF", "PTR - PC/pathway (problem-oriented) query response"),
            ("PCG", "PPG - PC/pathway (goal-oriented) add"),
            ("PCH", "PPG - PC/pathway (goal-oriented) update"),
            ("PCJ", "PPG - PC/pathway (goal-oriented) delete"),
            ("PCK", "QRY - PC/pathway (goal-oriented) query"),
            ("PCL", "PPT - PC/pathway (goal-oriented) query response"),
            ("Q01", "QRY/DSR - Query sent for immediate response"),
            ("Q02", "QRY/QCK - Query sent for deferred response"),
            ("Q03", "DSR/ACK - Deferred response to a query"),
            ("Q04", "EQQ - Embedded query language query"),
            ("Q05", "UDM/ACK - Unsolicited display update message"),
            ("Q06", "OSQ/OSR - Query for order status"),
            ("Q07", "VQQ - Virtual table query"),
            ("Q08", "SPQ - Stored procedure request"),
            ("Q09", "RQQ - Event replay query"),
            ("R01", "ORU/ACK - Unsolicited transmission of an observation message"),
            ("R02", "QRY - Query for results of observation"),
            (
                "R03",
                "QRY/DSR - Display-oriented results, query/unsol. update (for backward compatibility only)",
            ),
            ("R04", "ORF - Response to query; transmission of requested observation"),
            ("R05", "QRY/DSR - Query for display results"),
            ("R06", "UDM - Unsolicited update/display results"),
            ("R07", "EDR - Enhanced display response"),
            ("R08", "TBR - Tabular data response"),
            ("R09", "ERP - Event replay response"),
            ("R0R", "R0R - Pharmacy/treatment order response"),
            ("RAR", "RAR - Pharmacy administration information query response"),
            ("RDR", "RDR - Pharmacy dispense information query response"),
            ("RER", "RER - Pharmacy encoded order information query response"),
            ("RGR", "RGR - Pharmacy dose information query response"),
            ("S01", "SRM/SRR - Request new appointment booking"),
            ("S02", "SRM/SRR - Request appointment rescheduling"),
            ("S03", "SRM/SRR - Request appointment modification"),
            ("S04", "SRM/SRR - Request appointment cancellation"),
            ("S05", "SRM/SRR - Request appointment discontinuation"),
            ("S06", "SRM/SRR - Request appointment deletion"),
            ("S07", "SRM/SRR - Request addition of service/resource on appointment"),
            (
                "S08",
                "SRM/SRR - Request modification of service/resource on appointment",
            ),
            (
                "S09",
                "SRM/SRR - Request cancellation of service/resource on appointment",
            ),
            (
                "S10",
                "SRM/SRR - Request discontinuation of service/resource on appointment",
            ),
            ("S11", "SRM/SRR - Request deletion of service/resource on appointment"),
            ("S12", "SIU/ACK - Notification of new appointment booking"),
            ("S13", "SIU/ACK - Notification of appointment rescheduling"),
            ("S14", "SIU/ACK - Notification of appointment modification"),
            ("S15", "SIU/ACK - Notification of appointment cancellation"),
            ("S16", "SIU/ACK - Notification of appointment discontinuation"),
            ("S17", "SIU/ACK - Notification of appointment deletion"),
            (
                "S18",
                "SIU/ACK - Notification of addition of service/resource on appointment",
            ),
            (
                "S19",
                "SIU/ACK - Notification of modification of service/resource on appointment",
            ),
            (
                "S20",
                "SIU/ACK - Notification of cancellation of service/resource on appointment",
            ),
            (
                "S21",
                "SIU/ACK - Notification of discontinuation of service/resource on appointment",
            ),
            (
                "S22",
                "SIU/ACK - Notification of deletion of service/resource on appointment",
            ),
            ("S23", "SIU/ACK - Notification of blocked schedule time slot(s)"),
            (
                "S24",
                "SIU/ACK - Notification of opened (\"unblocked\") schedule time slot(s)",
            ),
            ("S25", "SQM/SQR - Schedule query message and response"),
            (
                "S26",
                "SIU/ACK - Notification that patient did not show up for scheduled appointment",
            ),
            ("T01", "MDM/ACK - Original document notification"),
            ("T02", "MDM/ACK - Original document notification and content"),
            ("T03", "MDM/ACK - Document status change notification"),
            ("T04", "MDM/ACK - Document status change notification and content"),
            ("T05", "MDM/ACK - Document addendum notification"),
            ("T06", "MDM/ACK - Document addendum notification and content"),
            ("T07", "MDM/ACK - Document edit notification"),
            ("T08", "MDM/ACK - Document edit notification and content"),
            ("T09", "MDM/ACK - Document replacement notification"),
            ("T10", "MDM/ACK - Document replacement notification and content"),
            ("T11", "MDM/ACK - Document cancel notification"),
            ("T12", "QRY/DOC - Document query"),
            ("V01", "VXQ - Query for vaccination record"),
            (
                "V02",
                "VXX - Response to vaccination query returning multiple PID matches",
            ),
            ("V03", "VXR - Vaccination record response"),
            ("V04", "VXU - Unsolicited vaccination record update"),
            (
                "varies",
                "MFQ/MFR - Master files query (use event same as asking for e.g., M05 - location)",
            ),
            (
                "W01",
                "ORU - Waveform result, unsolicited transmission of requested information",
            ),
            ("W02", "QRF - Waveform result, response to query"),
        ),
    ),
    "0004": (
        "Patient class",
        (
            ("B", "Obstetrics"),
            ("E", "Emergency"),
            ("I", "Inpatient"),
            ("O", "Outpatient"),
            ("P", "Preadmit"),
            ("R", "Recurring patient"),
        ),
    ),
    "0005": (
        "Race",
        (
            ("1002-5", "1002-5"),
            ("2028-9", "2028-9"),
            ("2054-5", "2054-5"),
            ("2076-8", "2076-8"),
            ("2106-3", "2106-3"),
            ("2131-1", "2131-1"),
        ),
    ),
    "0006": (
        "Religion",
        (
            ("ABC", "ABC"),
            ("AGN", "AGN"),
            ("AME", "AME"),
            ("AMT", "AMT"),
            ("ANG", "ANG"),
            ("AOG", "AOG"),
            ("ATH", "ATH"),
            ("BAH", "BAH"),
            ("BAP", "BAP"),
            ("BMA", "BMA"),
            ("BOT", "BOT"),
            ("BTA", "BTA"),
            ("BTH", "BTH"),
            ("BUD", "BUD"),
            ("CAT", "CAT"),
            ("CFR", "CFR"),
            ("CHR", "CHR"),
            ("CHS", "CHS"),
            ("CMA", "CMA"),
            ("CNF", "CNF"),
            ("COC", "COC"),
            ("COG", "COG"),
            ("COI", "COI"),
            ("COL", "COL"),
            ("COM", "COM"),
            ("COP", "COP"),
            ("COT", "COT"),
            ("CRR", "CRR"),
            ("EOT", "EOT"),
            ("EPI", "EPI"),
            ("ERL", "ERL"),
            ("EVC", "EVC"),
            ("FRQ", "FRQ"),
            ("FWB", "FWB"),
            ("GRE", "GRE"),
            ("HIN", "HIN"),
            ("HOT", "HOT"),
            ("HSH", "HSH"),
            ("HVA", "HVA"),
            ("JAI", "JAI"),
            ("JCO", "JCO"),
            ("JEW", "JEW"),
            ("JOR", "JOR"),
            ("JOT", "JOT"),
            ("JRC", "JRC"),
            ("JRF", "JRF"),
            ("JRN", "JRN"),
            ("JWN", "JWN"),
            ("LMS", "LMS"),
            ("LUT", "LUT"),
            ("MEN", "MEN"),
            ("MET", "MET"),
            ("MOM", "MOM"),
            ("MOS", "MOS"),
            ("MOT", "MOT"),
            ("MSH", "MSH"),
            ("MSU", "MSU"),
            ("NAM", "NAM"),
            ("NAZ", "NAZ"),
            ("NOE", "NOE"),
            ("NRL", "NRL"),
            ("ORT", "ORT"),
            ("OTH", "OTH"),
            ("PEN", "PEN"),
            ("PRC", "PRC"),
            ("PRE", "PRE"),
            ("PRO", "PRO"),
            ("QUA", "QUA"),
            ("REC", "REC"),
            ("REO", "REO"),
            ("SAA", "SAA"),
            ("SEV", "SEV"),
            ("SHN", "SHN"),
            ("SIK", "SIK"),
            ("SOU", "SOU"),
            ("SPI", "SPI"),
            ("UCC", "UCC"),
            ("UMD", "UMD"),
            ("UNI", "UNI"),
            ("UNU", "UNU"),
            ("VAR", "VAR"),
            ("WES", "WES"),
            ("WMC", "WMC"),
        ),
    ),
    "0007": (
        "Admission type",
        (
            ("A", "Accident"),
            ("E", "Emergency"),
            ("L", "Labor and Delivery"),
            ("R", "Routine"),
        ),
    ),
    "0008": (
        "Acknowledgment code",
        (
            (
                "AA",
                "Original mode: Application Accept - Enhanced mode: Application acknowledgment: Accept",
            ),
            (
                "AE",
                "Original mode: Application Error - Enhanced mode: Application acknowledgment: Error",
            ),
            (
                "AR",
                "Original mode: Application Reject - Enhanced mode: Application acknowledgment: Reject",
            ),
            ("CA", "Enhanced mode: Accept acknowledgment: Commit Accept"),
            ("CE", "Enhanced mode: Accept acknowledgment: Commit Error"),
            ("CR", "Enhanced mode: Accept acknowledgment: Commit Reject"),
        ),
    ),
    "0009": (
        "Ambulatory status",
        (
            ("A0", "No functional limitations"),
            ("A1", "Ambulates with assistive device"),
            ("A2", "Wheelchair/stretcher bound"),
            ("A3", "Comatose; non-responsive"),
            ("A4", "Disoriented"),
            ("A5", "Vision impaired"),
            ("A6", "Hearing impaired"),
            ("A7", "Speech impaired"),
            ("A8", "Non-English speaking"),
            ("A9", "Functional level unknown"),
            ("B1", "Oxygen therapy"),
            ("B2", "Special equipment (tubes, IVs, catheters)"),
            ("B3", "Amputee"),
            ("B4", "Mastectomy"),
            ("B5", "Paraplegic"),
            ("B6", "Pregnant"),
        ),
    ),
    "0010": ("Physician ID", ()),
    "0017": (
        "Transaction Type",
        (("AJ", "Adjustment"), ("CD", "Credit"), ("CG", "Charge"), ("PY", "Payment")),
    ),
    "0018": ("Patient Type", ()),
    "0019": ("Anesthesia Code", ()),
    "0021": ("Bad Debt Agency Code", ()),
    "0022": ("Billing Status", ()),
    "0023": (
        "Admit source",
        (
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("6", "6"),
            ("7", "7"),
            ("8", "8"),
            ("9", "9"),
        ),
    ),
    "0024": ("Fee Schedule", ()),
    "0027": (
        "Priority",
        (
            ("A", "As soon as possible (a priority lower than stat)"),
            ("P", "Preoperative (to be done prior to surgery)"),
            ("R", "Routine"),
            ("S", "Stat (do immediately)"),
            ("T", "Timing critical (do as near as possible to requested time)"),
        ),
    ),
    "0032": ("Charge/Price Indicator", ()),
    "0038": (
        "Order status",
        (
            ("A", "Some, but not all, results available"),
            ("CA", "Order was canceled"),
            ("CM", "Order is completed"),
            ("DC", "Order was discontinued"),
            ("ER", "Error, order not found"),
            ("HD", "Order is on hold"),
            ("IP", "In process, unspecified"),
            ("RP", "Order has been replaced"),
            ("SC", "In process, scheduled"),
        ),
    ),
    "0042": ("Company Plan Code", ()),
    "0043": (
        "Condition code",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("07", "07"),
            ("08", "08"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("13", "13"),
            ("14", "14"),
            ("15", "15"),
            ("16", "16"),
            ("18", "18"),
            ("19", "19"),
            ("20", "20"),
            ("21", "21"),
            ("26", "26"),
            ("27", "27"),
            ("28", "28"),
            ("29", "29"),
            ("31", "31"),
            ("32", "32"),
            ("33", "33"),
            ("34", "34"),
            ("36", "36"),
            ("37", "37"),
            ("38", "38"),
            ("39", "39"),
            ("40", "40"),
            ("41", "41"),
            ("46", "46"),
            ("48", "48"),
            ("55", "55"),
            ("56", "56"),
            ("57", "57"),
            ("60", "60"),
            ("61", "61"),
            ("62", "62"),
            ("66", "66"),
            ("67", "67"),
            ("68", "68"),
            ("70", "70"),
            ("71", "71"),
            ("72", "72"),
            ("73", "73"),
            ("74", "74"),
            ("75", "75"),
            ("76", "76"),
            ("77", "77"),
            ("78", "78"),
            ("79", "79"),
            ("80", "80"),
        ),
    ),
    "0044": ("Contract Code", ()),
    "0045": ("Courtesy Code", ()),
    "0046": ("Credit Rating", ()),
    "0048": (
        "What subject filter",
        (
            ("ADV", "ADV"),
            ("ANU", "ANU"),
            ("APA", "APA"),
            ("APM", "APM"),
            ("APN", "APN"),
            ("APP", "APP"),
            ("ARN", "ARN"),
            ("CAN", "CAN"),
            ("DEM", "DEM"),
            ("FIN", "FIN"),
            ("GOL", "GOL"),
            ("MRI", "MRI"),
            ("MRO", "MRO"),
            ("NCK", "NCK"),
            ("NSC", "NSC"),
            ("NST", "NST"),
            ("ORD", "ORD"),
            ("OTH", "OTH"),
            ("PRB", "PRB"),
            ("PRO", "PRO"),
            ("RAR", "RAR"),
            ("RDR", "RDR"),
            ("RER", "RER"),
            ("RES", "RES"),
            ("RGR", "RGR"),
            ("ROR", "ROR"),
            ("SAL", "SAL"),
            ("SBK", "SBK"),
            ("SBL", "SBL"),
            ("SOP", "SOP"),
            ("SSA", "SSA"),
            ("SSR", "SSR"),
            ("STA", "STA"),
            ("VXI", "VXI"),
        ),
    ),
    "0049": ("Department Code", ()),
    "0050": ("Accident Code", ()),
    "0051": ("Diagnosis Code", ()),
    "0052": ("Diagnosis Type", (("A", "A"), ("F", "F"), ("W", "W"))),
    "0053": ("Diagnosis Coding Method", ()),
    "0055": ("Diagnosis Related Group", ()),
    "0056": ("DRG Grouper Review Code", ()),
    "0059": ("Consent Code", ()),
    "0061": (
        "Check digit scheme",
        (
            ("ISO", "ISO 7064: 1983"),
            ("M10", "Mod 10 algorithm"),
            ("M11", "Mod 11 algorithm"),
            ("NPI", "Check digit algorithm in the US National Provider Identifier"),
        ),
    ),
    "0062": (
        "Event reason",
        (
            ("01", "Patient request"),
            ("02", "Physician/health practitioner order"),
            ("03", "Census management"),
        ),
    ),
    "0063": (
        "Relationship",
        (
            ("ASC", "ASC"),
            ("BRO", "BRO"),
            ("CGV", "CGV"),
            ("CHD", "CHD"),
            ("DEP", "DEP"),
            ("DOM", "DOM"),
            ("EMC", "EMC"),
            ("EME", "EME"),
            ("EMR", "EMR"),
            ("EXF", "EXF"),
            ("FCH", "FCH"),
            ("FND", "FND"),
            ("FTH", "FTH"),
            ("GCH", "GCH"),
            ("GRD", "GRD"),
            ("GRP", "GRP"),
            ("MGR", "MGR"),
            ("MTH", "MTH"),
            ("NCH", "NCH"),
            ("NON", "NON"),
            ("OAD", "OAD"),
            ("OTH", "OTH"),
            ("OWN", "OWN"),
            ("PAR", "PAR"),
            ("SCH", "SCH"),
            ("SEL", "SEL"),
            ("SIB", "SIB"),
            ("SIS", "SIS"),
            ("SPO", "SPO"),
            ("TRA", "TRA"),
            ("UNK", "UNK"),
            ("WRD", "WRD"),
        ),
    ),
    "0064": ("Financial Class", ()),
    "0065": (
        "Specimen action code",
        (
            ("A", "Add ordered tests to the existing specimen"),
            ("G", "Generated order; reflex order"),
            ("L", "Lab to obtain specimen from patient"),
            ("O", "Specimen obtained by service other than Lab"),
            ("P", "Pending specimen; Order sent prior to delivery"),
            ("R", "Revised order"),
            ("S", "Schedule the tests specified below"),
        ),
    ),
    "0066": (
        "Employment status",
        (
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("6", "6"),
            ("9", "9"),
            ("C", "C"),
            ("D", "D"),
            ("F", "F"),
            ("L", "L"),
            ("O", "O"),
            ("P", "P"),
            ("T", "T"),
        ),
    ),
    "0068": ("Guarantor Type", ()),
    "0069": (
        "Hospital service",
        (
            ("CAR", "Cardiac Service"),
            ("MED", "Medical Service"),
            ("PUL", "Pulmonary Service"),
            ("SUR", "Surgical Service"),
            ("URO", "Urology Service"),
        ),
    ),
    "0070": (
        "Specimen source codes",
        (
            ("ABS", "ABS"),
            ("AMN", "AMN"),
            ("ASP", "ASP"),
            ("BBL", "BBL"),
            ("BDY", "BDY"),
            ("BIFL", "BIFL"),
            ("BLD", "BLD"),
            ("BLDA", "BLDA"),
            ("BLDC", "BLDC"),
            ("BLDV", "BLDV"),
            ("BON", "BON"),
            ("BPH", "BPH"),
            ("BPU", "BPU"),
            ("BRN", "BRN"),
            ("BRO", "BRO"),
            ("BRTH", "BRTH"),
            ("CALC", "CALC"),
            ("CBLD", "CBLD"),
            ("CDM", "CDM"),
            ("CNJT", "CNJT"),
            ("CNL", "CNL"),
            ("COL", "COL"),
            ("CSF", "CSF"),
            ("CTP", "CTP"),
            ("CUR", "CUR"),
            ("CVM", "CVM"),
            ("CVX", "CVX"),
            ("CYST", "CYST"),
            ("DIAF", "DIAF"),
            ("DOSE", "DOSE"),
            ("DRN", "DRN"),
            ("DUFL", "DUFL"),
            ("EAR", "EAR"),
            ("EARW", "EARW"),
            ("ELT", "ELT"),
            ("ENDC", "ENDC"),
            ("ENDM", "ENDM"),
            ("EOS", "EOS"),
            ("EXHLD", "EXHLD"),
            ("EYE", "EYE"),
            ("FIB", "FIB"),
            ("FIST", "FIST"),
            ("FLT", "FLT"),
            ("FLU", "FLU"),
            ("GAS", "GAS"),
            ("GAST", "GAST"),
            ("GEN", "GEN"),
            ("GENC", "GENC"),
            ("GENL", "GENL"),
            ("GENV", "GENV"),
            ("HAR", "HAR"),
            ("IHG", "IHG"),
            ("ISLT", "ISLT"),
            ("IT", "IT"),
            ("LAM", "LAM"),
            ("LIQ", "LIQ"),
            ("LN", "LN"),
            ("LNA", "LNA"),
            ("LNV", "LNV"),
            ("LYM", "LYM"),
            ("MAC", "MAC"),
            ("MAR", "MAR"),
            ("MBLD", "MBLD"),
            ("MEC", "MEC"),
            ("MILK", "MILK"),
            ("MLK", "MLK"),
            ("NAIL", "NAIL"),
            ("NOS", "NOS"),
            ("ORH", "ORH"),
            ("PAFL", "PAFL"),
            ("PAT", "PAT"),
            ("PLAS", "PLAS"),
            ("PLB", "PLB"),
            ("PLC", "PLC"),
            ("PLR", "PLR"),
            ("PMN", "PMN"),
            ("PPP", "PPP"),
            ("PRP", "PRP"),
            ("PRT", "PRT"),
            ("PUS", "PUS"),
            ("RBC", "RBC"),
            ("RT", "RT"),
            ("SAL", "SAL"),
            ("SEM", "SEM"),
            ("SER", "SER"),
            ("SKM", "SKM"),
            ("SKN", "SKN"),
            ("SNV", "SNV"),
            ("SPRM", "SPRM"),
            ("SPT", "SPT"),
            ("SPTC", "SPTC"),
            ("SPTT", "SPTT"),
            ("STL", "STL"),
            ("STON", "STON"),
            ("SWT", "SWT"),
            ("TEAR", "TEAR"),
            ("THRB", "THRB"),
            ("THRT", "THRT"),
            ("TISG", "TISG"),
            ("TISPL", "TISPL"),
            ("TISS", "TISS"),
            ("TISU", "TISU"),
            ("TLGI", "TLGI"),
            ("TLNG", "TLNG"),
            ("TSMI", "TSMI"),
            ("TUB", "TUB"),
            ("ULC", "ULC"),
            ("UMB", "UMB"),
            ("UMED", "UMED"),
            ("UR", "UR"),
            ("URC", "URC"),
            ("URNS", "URNS"),
            ("URT", "URT"),
            ("URTH", "URTH"),
            ("USUB", "USUB"),
            ("VOM", "VOM"),
            ("WAT", "WAT"),
            ("WBC", "WBC"),
            ("WICK", "WICK"),
            ("WND", "WND"),
            ("WNDA", "WNDA"),
            ("WNDD", "WNDD"),
            ("WNDE", "WNDE"),
            ("XXX", "XXX"),
        ),
    ),
    "0072": ("Insurance plan ID", ()),
    "0073": ("Interest Rate Code", ()),
    "0074": (
        "Diagnostic service section ID",
        (
            ("AU", "AU"),
            ("BG", "BG"),
            ("BLB", "BLB"),
            ("CH", "CH"),
            ("CP", "CP"),
            ("CT", "CT"),
            ("CTH", "CTH"),
            ("CUS", "CUS"),
            ("EC", "EC"),
            ("EN", "EN"),
            ("HM", "HM"),
            ("ICU", "ICU"),
            ("IMM", "IMM"),
            ("LAB", "LAB"),
            ("MB", "MB"),
            ("MCB", "MCB"),
            ("MYC", "MYC"),
            ("NMR", "NMR"),
            ("NMS", "NMS"),
            ("NRS", "NRS"),
            ("OSL", "OSL"),
            ("OT", "OT"),
            ("OTH", "OTH"),
            ("OUS", "OUS"),
            ("PF", "PF"),
            ("PHR", "PHR"),
            ("PHY", "PHY"),
            ("PT", "PT"),
            ("RAD", "RAD"),
            ("RC", "RC"),
            ("RT", "RT"),
            ("RUS", "RUS"),
            ("RX", "RX"),
            ("SP", "SP"),
            ("SR", "SR"),
            ("TX", "TX"),
            ("VR", "VR"),
            ("VUS", "VUS"),
            ("XRC", "XRC"),
        ),
    ),
    "0076": (
        "Message type",
        (
            ("ACK", "General acknowledgment message"),
            ("ADR", "ADT response"),
            ("ADT", "ADT message"),
            ("ARD", "Ancillary RPT (display)"),
            ("BAR", "Add/change billing account"),
            ("CRM", "Clinical study registration message"),
            ("CSU", "Unsolicited study data message"),
            ("DFT", "Detail financial transactions"),
            ("DOC", "Document response"),
            ("DSR", "Display response"),
            ("EDR", "Enhanced display response"),
            ("EQQ", "Embedded query language query"),
            ("ERP", "Event replay response"),
            (
                "MCF",
                "Delayed acknowledgment (retained for backward compatibility only)",
            ),
            ("MDM", "Medical document management"),
            ("MFD", "Master files delayed application acknowledgment"),
            ("MFK", "Master files application acknowledgment"),
            ("MFN", "Master files notification"),
            ("MFQ", "Master files query"),
            ("MFR", "Master files response"),
            ("NMD", "Application management data message"),
            ("NMQ", "Application management query message"),
            ("NMR", "Application management response message"),
            ("ORF", "Query for results of observation"),
            ("ORM", "Pharmacy/treatment order message"),
            ("ORR", "General order response message response to any ORM"),
            ("ORU", "Unsolicited transmission of an observation message"),
            ("OSQ", "Query response for order status"),
            ("OSR", "Query response for order status"),
            ("PEX", "Product experience message"),
            ("PGL", "Patient goal message"),
            ("PIN", "Patient insurance information"),
            ("PPG", "Patient pathway message (goal-oriented)"),
            ("PPP", "Patient pathway message (problem-oriented)"),
            ("PPR", "Patient problem message"),
            ("PPT", "Patient pathway goal-oriented response"),
            ("PPV", "Patient goal response"),
            ("PRR", "Patient problem response"),
            ("PTR", "Patient pathway problem-oriented response"),
            ("QCK", "Deferred query"),
            ("QRY", "Query, original mode"),
            ("RAR", "Pharmacy/treatment administration information"),
            ("RAS", "Pharmacy/treatment administration message"),
            ("RCI", "Return clinical information"),
            ("RCL", "Return clinical list"),
            ("RDE", "Pharmacy/treatment encoded order message"),
            ("RDR", "Pharmacy/treatment dispense information"),
            ("RDS", "Pharmacy/treatment dispense message"),
            ("REF", "Patient referral"),
            ("RER", "Pharmacy/treatment encoded order information"),
            ("RGR", "Pharmacy/treatment dose information"),
            ("RGV", "Pharmacy/treatment give message"),
            ("ROR", "Pharmacy/treatment order response"),
            ("RPA", "Return patient authorization"),
            ("RPI", "Return patient information"),
            ("RPL", "Return patient display list"),
            ("RPR", "Return patient list"),
            ("RQA", "Request patient authorization"),
            ("RQC", "Request clinical information"),
            ("RQI", "Request patient information"),
            ("RQP", "Request patient demographics"),
            ("RQQ", "Event replay query"),
            ("RRA", "Pharmacy/treatment administration acknowledgment message"),
            ("RRD", "Pharmacy/treatment dispense acknowledgment message"),
            ("RRE", "Pharmacy/treatment encoded order acknowledgment message"),
            ("RRG", "Pharmacy/treatment give acknowledgment message"),
            ("RRI", "Return referral information"),
            ("SIU", "Schedule information unsolicited"),
            ("SPQ", "Stored procedure request"),
            ("SQM", "Schedule query message"),
            ("SQR", "Schedule query response"),
            ("SRM", "Schedule request message"),
            ("SRR", "Scheduled request response"),
            ("SUR", "Summary product experience report"),
            ("TBR", "Tabular response"),
            ("UDM", "Unsolicited display update message"),
            ("VQQ", "Virtual table query"),
            ("VXQ", "Query for vaccination record"),
            ("VXR", "Vaccination record response"),
            ("VXU", "Unsolicited vaccination record update"),
            ("VXX", "Response for vaccination query with multiple PID matches"),
        ),
    ),
    "0078": (
        "Abnormal flags",
        (
            ("<", "Below absolute low-off instrument scale"),
            (">", "Above absolute high-off instrument scale"),
            ("A", "Abnormal (applies to non-numeric results)"),
            (
                "AA",
                "Very abnormal (applies to non-numeric units, analogous to panic limits for numeric units)",
            ),
            ("B", "Better--use when direction not relevant"),
            ("D", "Significant change down"),
            ("For micriobo", "For micriobo"),
            ("H", "Above high normal"),
            ("HH", "Above upper panic limits"),
            ("I", "Intermediate"),
            ("L", "Below low normal"),
            ("LL", "Below lower panic limits"),
            ("MS", "Moderately susceptible"),
            ("N", "Normal (applies to non-numeric results)"),
            ("null", "null"),
            ("R", "Resistant"),
            ("S", "Susceptible"),
            ("U", "Significant change up"),
            ("VS", "Very susceptible"),
            ("W", "Worse--use when direction not relevant"),
        ),
    ),
    "0080": (
        "Nature of abnormal testing",
        (
            ("A", "An age-based population"),
            ("N", "None - generic normal range"),
            ("R", "A race-based population"),
            ("S", "A sex-based population"),
        ),
    ),
    "0083": ("Outlier Type", (("C", "C"), ("D", "D"))),
    "0084": ("Performed by", ()),
    "0085": (
        "Observation result status codes interpretation",
        (
            (
                "C",
                "Record coming over is a correction and thus replaces a final result",
            ),
            ("D", "Deletes the OBX record"),
            ("F", "Final results; Can only be changed with a corrected result."),
            ("I", "Specimen in lab; results pending"),
            (
                "N",
                "Not asked; used to affirmatively document that the observation identified in the OBX was not sought when the universal service ID in OBR-4 implies that it would be sought.",
            ),
            ("O", "Order detail description only (no result)"),
            ("P", "Preliminary results"),
            ("R", "Results entered -- not verified"),
            ("S", "Partial results"),
            (
                "U",
                "Results status change to final without retransmitting results already sent as 'preliminary.'  E.g., radiology changes status from preliminary to final",
            ),
            ("W", "Post original as wrong, e.g., transmitted for wrong patient"),
            ("X", "Results cannot be obtained for this observation"),
        ),
    ),
    "0086": ("Plan ID", ()),
    "0087": ("Pre-Admit Test Indicator", ()),
    "0088": ("Procedure Code", ()),
    "0089": ("Procedure Coding Method", ()),
    "0091": ("Query priority", (("D", "Deferred"), ("I", "Immediate"))),
    "0092": ("Re-admission indicator", (("R", "Re-admission"),)),
    "0093": ("Release information", (("N", "N"), ("Y", "Y"))),
    "0098": (
        "Type of agreement",
        (("M", "Maternity"), ("S", "Standard"), ("U", "Unified")),
    ),
    "0099": ("VIP Indicator", ()),
    "0100": (
        "When to charge",
        (
            ("D", "On discontinue"),
            ("O", "On order"),
            ("R", "At time service is completed"),
            ("S", "At time service is started"),
            ("T", "At a designated date/time"),
        ),
    ),
    "0102": (
        "Delayed acknowledgment type",
        (
            ("D", "Message received, stored for later processing"),
            ("F", "Acknowledgment after processing"),
        ),
    ),
    "0103": (
        "Processing ID",
        (("D", "Debugging"), ("P", "Production"), ("T", "Training")),
    ),
    "0104": (
        "Version ID",
        (
            ("2.0", "Release 2.0"),
            ("2.0D", "Demo 2.0"),
            ("2.1", "Release 2. 1"),
            ("2.2", "Release 2.2"),
            ("2.3", "Release 2.3"),
            ("2.3.1", "Release 2.3.1"),
            ("2.3.2", "2.3.2"),
        ),
    ),
    "0105": (
        "Source of comment",
        (
            ("L", "Ancillary (filler) department is source of comment"),
            ("O", "Other system is source of comment"),
            ("P", "Orderer (placer) is source of comment"),
        ),
    ),
    "0106": ("Query/response format code", (("D", "D"), ("R", "R"), ("T", "T"))),
    "0107": (
        "Deferred response type",
        (
            ("B", "Before the Date/Time specified"),
            ("L", "Later than the Date/Time specified"),
        ),
    ),
    "0108": (
        "Query results level",
        (
            ("O", "Order plus order status"),
            ("R", "Results without bulk text"),
            ("S", "Status only"),
            ("T", "Full results"),
        ),
    ),
    "0109": ("Report priority", (("R", "R"), ("S", "S"))),
    "0110": ("Transfer to Bad Debt Code", ()),
    "0111": ("Delete Account Code", ()),
    "0112": (
        "Discharge disposition",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("07", "07"),
            ("08", "08"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("13", "13"),
            ("14", "14"),
            ("15", "15"),
            ("16", "16"),
            ("17", "17"),
            ("18", "18"),
            ("19", "19"),
            ("20", "20"),
            ("21", "21"),
            ("22", "22"),
            ("23", "23"),
            ("24", "24"),
            ("25", "25"),
            ("26", "26"),
            ("27", "27"),
            ("28", "28"),
            ("29", "29"),
            ("30", "30"),
            ("31", "31"),
            ("32", "32"),
            ("33", "33"),
            ("34", "34"),
            ("35", "35"),
            ("36", "36"),
            ("37", "37"),
            ("38", "38"),
            ("39", "39"),
            ("40", "40"),
            ("41", "41"),
            ("42", "42"),
        ),
    ),
    "0113": ("Discharged to Location", ()),
    "0114": ("Diet Type", ()),
    "0115": ("Servicing Facility", ()),
    "0116": (
        "Bed status",
        (
            ("C", "Closed"),
            ("H", "Housekeeping"),
            ("I", "Isolated"),
            ("K", "Contaminated"),
            ("O", "Occupied"),
            ("U", "Unoccupied"),
        ),
    ),
    "0117": ("Account Status", ()),
    "0118": ("Major Diagnostic Category", ()),
    "0119": (
        "Order control codes and their meaning",
        (
            ("AF", "Order/service refill request approval"),
            ("CA", "Cancel order/service request"),
            ("CH", "Child order/service"),
            ("CN", "Combined result"),
            ("CR", "Canceled as requested"),
            ("DC", "Discontinue order/service request"),
            ("DE", "Data errors"),
            ("DF", "Order/service refill request denied"),
            ("DR", "Discontinued as requested"),
            ("FU", "Order/service refilled, unsolicited"),
            ("HD", "Hold order request"),
            ("HR", "On hold as requested"),
            ("LI", "Link order/service to patient care problem or goal"),
            ("NA", "Number assigned"),
            ("NW", "New order/service"),
            ("OC", "Order/service canceled"),
            ("OD", "Order/service discontinued"),
            ("OE", "Order/service released"),
            ("OF", "Order/service refilled as requested"),
            ("OH", "Order/service held"),
            ("OK", "Order/service accepted & OK"),
            ("OR", "Released as requested"),
            ("PA", "Parent order/service"),
            ("RE", "Observations/performed service to follow"),
            ("RF", "Refill order/service request"),
            ("RL", "Release previous hold"),
            ("RO", "Replacement order"),
            ("RP", "Order/service replace request"),
            ("RQ", "Replaced as requested"),
            ("RR", "Request received"),
            ("RU", "Replaced unsolicited"),
            ("SC", "Status changed"),
            ("SN", "Send order/service number"),
            ("SR", "Response to send order/service status request"),
            ("SS", "Send order/service status request"),
            ("UA", "Unable to accept order/service"),
            ("UC", "Unable to cancel"),
            ("UD", "Unable to discontinue"),
            ("UF", "Unable to refill"),
            ("UH", "Unable to put on hold"),
            ("UM", "Unable to replace"),
            ("UN", "Unlink order/service from patient care problem or goal"),
            ("UR", "Unable to release"),
            ("UX", "Unable to change"),
            ("XO", "Change order/service request"),
            ("XR", "Changed as requested"),
            ("XX", "Order/service changed, unsolicited"),
        ),
    ),
    "0121": (
        "Response flag",
        (
            ("D", "Same as R, also other associated segments"),
            ("E", "Report exceptions only"),
            ("F", "Same as D, plus confirmations explicitly"),
            ("N", "Only the MSA segment is returned"),
            ("R", "Same as E, also Replacement and Parent-Child"),
        ),
    ),
    "0122": (
        "Charge type",
        (
            ("CH", "Charge"),
            ("CO", "Contract"),
            ("CR", "Credit"),
            ("DP", "Department"),
            ("GR", "Grant"),
            ("NC", "No Charge"),
            ("PC", "Professional"),
            ("RS", "Research"),
        ),
    ),
    "0123": (
        "Result status",
        (
            ("A", "Some, but not all, results available"),
            ("C", "Correction to results"),
            (
                "F",
                "Final results; results stored and verified. Can only be changed with a corrected result.",
            ),
            ("I", "No results available; specimen received, procedure incomplete"),
            ("O", "Order received; specimen not yet received"),
            (
                "P",
                "Preliminary: A verified early result is available, final results not yet obtained",
            ),
            ("R", "Results stored; not yet verified"),
            ("S", "No results available; procedure scheduled, but not done"),
            ("X", "No results available; Order canceled."),
            ("Y", "No order on record for this test. (Used only on queries)"),
            ("Z", "No record of this patient. (Used only on queries)"),
        ),
    ),
    "0124": (
        "Transportation mode",
        (("CART", "CART"), ("PORT", "PORT"), ("WALK", "WALK"), ("WHLC", "WHLC")),
    ),
    "0125": (
        "Value type",
        (
            ("AD", "Address"),
            ("CE", "Coded Entry"),
            ("CF", "Coded Element With Formatted Values"),
            ("CK", "Composite ID With Check Digit"),
            ("CN", "Composite ID And Name"),
            ("CP", "Composite Price"),
            ("CX", "Extended Composite ID With Check Digit"),
            ("DT", "Date"),
            ("ED", "Encapsulated Data"),
            ("FT", "Formatted Text (Display)"),
            ("MO", "Money"),
            ("NM", "Numeric"),
            ("PN", "Person Name"),
            ("RP", "Reference Pointer"),
            ("SN", "Structured Numeric"),
            ("ST", "String Data."),
            ("TM", "Time"),
            ("TN", "Telephone Number"),
            ("TS", "Time Stamp (Date & Time)"),
            ("TX", "Text Data (Display)"),
            ("XAD", "Extended Address"),
            ("XCN", "Extended Composite Name And Number For Persons"),
            ("XON", "Extended Composite Name And Number For Organizations"),
            ("XPN", "Extended Person Name"),
            ("XTN", "Extended Telecommunications Number"),
        ),
    ),
    "0126": (
        "Quantity limited request",
        (
            ("CH", "Characters"),
            ("LI", "Lines"),
            ("PG", "Pages"),
            ("RD", "Records"),
            ("ZO", "Locally defined"),
        ),
    ),
    "0127": ("Allergy type", (("DA", "DA"), ("FA", "FA"), ("MA", "MA"), ("MC", "MC"))),
    "0128": ("Allergy severity", (("MI", "MI"), ("MO", "MO"), ("SV", "SV"))),
    "0129": ("Accommodation Code", ()),
    "0130": (
        "Visit user code",
        (("HO", "HO"), ("MO", "MO"), ("PH", "PH"), ("TE", "TE")),
    ),
    "0131": (
        "Contact Role",
        (
            ("C", "C"),
            ("E", "E"),
            ("F", "F"),
            ("I", "I"),
            ("N", "N"),
            ("O", "O"),
            ("S", "S"),
            ("U", "U"),
        ),
    ),
    "0132": ("Transaction Code", ()),
    "0133": (
        "Procedure practitioner identifier code type",
        (
            ("AN", "AN"),
            ("AS", "AS"),
            ("CM", "CM"),
            ("NP", "NP"),
            ("PR", "PR"),
            ("PS", "PS"),
            ("RD", "RD"),
            ("RS", "RS"),
            ("SN", "SN"),
        ),
    ),
    "0135": ("Assignment of benefits", (("M", "M"), ("N", "N"), ("Y", "Y"))),
    "0136": ("Yes/no indicator", (("N", "No"), ("Y", "Yes"))),
    "0137": (
        "Mail claim party",
        (("E", "E"), ("G", "G"), ("I", "I"), ("O", "O"), ("P", "P")),
    ),
    "0139": ("Employer Information Data", ()),
    "0140": (
        "Military service",
        (
            ("NATO", "NATO"),
            ("NOAA", "NOAA"),
            ("USA", "USA"),
            ("USAF", "USAF"),
            ("USCG", "USCG"),
            ("USMC", "USMC"),
            ("USN", "USN"),
            ("USPHS", "USPHS"),
        ),
    ),
    "0141": (
        "Military rank/grade",
        (
            ("E1 ... E9", "E1 ... E9"),
            ("O1 ... O10", "O1 ... O10"),
            ("W1 ... W4", "W1 ... W4"),
        ),
    ),
    "0142": ("Military status", (("ACT", "ACT"), ("DEC", "DEC"), ("RET", "RET"))),
    "0143": ("Non-covered Insurance Code", ()),
    "0144": (
        "Eligibility source",
        (
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("6", "6"),
            ("7", "7"),
        ),
    ),
    "0145": (
        "Room type",
        (
            ("2ICU", "2ICU"),
            ("2PRI", "2PRI"),
            ("2SPR", "2SPR"),
            ("ICU", "ICU"),
            ("PRI", "PRI"),
            ("SPR", "SPR"),
        ),
    ),
    "0146": (
        "Amount type",
        (("DF", "DF"), ("LM", "LM"), ("PC", "PC"), ("RT", "RT"), ("UL", "UL")),
    ),
    "0147": (
        "Policy type",
        (
            ("2ANC", "2ANC"),
            ("2MMD", "2MMD"),
            ("3MMD", "3MMD"),
            ("ANC", "ANC"),
            ("MMD", "MMD"),
        ),
    ),
    "0148": ("Penalty type", (("AT", "AT"), ("PC", "PC"))),
    "0149": ("Day type", (("AP", "AP"), ("DE", "DE"), ("PE", "PE"))),
    "0150": (
        "Pre-certification patient type",
        (("ER", "ER"), ("IPE", "IPE"), ("OPE", "OPE"), ("UR", "UR")),
    ),
    "0151": ("Second Opinion Status", ()),
    "0152": ("Second Opinion Documentation Received", ()),
    "0153": (
        "Value code",
        (
            ("01", "01"),
            ("02", "02"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("08", "08"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("13", "13"),
            ("14", "14"),
            ("15", "15"),
            ("16", "16"),
            ("17", "17"),
            ("21", "21"),
            ("22", "22"),
            ("23", "23"),
            ("24", "24"),
            ("30", "30"),
            ("31", "31"),
            ("37", "37"),
            ("38", "38"),
            ("39", "39"),
            ("40", "40"),
            ("41", "41"),
            ("42", "42"),
            ("43", "43"),
            ("44", "44"),
            ("45", "45"),
            ("46", "46"),
            ("47", "47"),
            ("48", "48"),
            ("49", "49"),
            ("50", "50"),
            ("51", "51"),
            ("52", "52"),
            ("53", "53"),
            ("56", "56"),
            ("57", "57"),
            ("58", "58"),
            ("59", "59"),
            ("60", "60"),
            ("67", "67"),
            ("68", "68"),
            ("70 ... 72", "70 ... 72"),
            ("75 ... 79", "75 ... 79"),
            ("80", "80"),
            ("81", "81"),
            ("A1", "A1"),
            ("A2", "A2"),
            ("A3", "A3"),
            ("X0", "X0"),
            ("X4", "X4"),
        ),
    ),
    "0155": (
        "Accept/application acknowledgment conditions",
        (
            ("AL", "Always"),
            ("ER", "Error/reject conditions only"),
            ("NE", "Never"),
            ("SU", "Successful completion only"),
        ),
    ),
    "0156": (
        "Which date/time qualifier",
        (
            ("ANY", "ANY"),
            ("COL", "COL"),
            ("ORD", "ORD"),
            ("RCT", "RCT"),
            ("REP", "REP"),
            ("SCHED", "SCHED"),
        ),
    ),
    "0157": (
        "Which date/time status qualifier",
        (
            ("ANY", "ANY"),
            ("CFN", "CFN"),
            ("COR", "COR"),
            ("FIN", "FIN"),
            ("PRE", "PRE"),
            ("REP", "REP"),
        ),
    ),
    "0158": (
        "Date/time selection qualifier",
        (("1ST", "1ST"), ("ALL", "ALL"), ("LST", "LST"), ("REV", "REV")),
    ),
    "0159": ("Diet code specification type", (("D", "D"), ("P", "P"), ("S", "S"))),
    "0160": (
        "Tray type",
        (
            ("EARLY", "EARLY"),
            ("GUEST", "GUEST"),
            ("LATE", "LATE"),
            ("MSG", "MSG"),
            ("NO", "NO"),
        ),
    ),
    "0161": ("Allow substitution", (("G", "G"), ("N", "N"), ("T", "T"))),
    "0162": (
        "Route of administration",
        (
            ("AP", "AP"),
            ("B", "B"),
            ("DT", "DT"),
            ("EP", "EP"),
            ("ET", "ET"),
            ("GTT", "GTT"),
            ("GU", "GU"),
            ("IA", "IA"),
            ("IB", "IB"),
            ("IC", "IC"),
            ("ICV", "ICV"),
            ("ID", "ID"),
            ("IH", "IH"),
            ("IHA", "IHA"),
            ("IM", "IM"),
            ("IMR", "IMR"),
            ("IN", "IN"),
            ("IO", "IO"),
            ("IP", "IP"),
            ("IS", "IS"),
            ("IT", "IT"),
            ("IU", "IU"),
            ("IV", "IV"),
            ("MM", "MM"),
            ("MTH", "MTH"),
            ("NG", "NG"),
            ("NP", "NP"),
            ("NS", "NS"),
            ("NT", "NT"),
            ("OP", "OP"),
            ("OT", "OT"),
            ("OTH", "OTH"),
            ("PF", "PF"),
            ("PO", "PO"),
            ("PR", "PR"),
            ("RM", "RM"),
            ("SC", "SC"),
            ("SD", "SD"),
            ("SL", "SL"),
            ("TD", "TD"),
            ("TL", "TL"),
            ("TP", "TP"),
            ("TRA", "TRA"),
            ("UR", "UR"),
            ("VG", "VG"),
            ("VM", "VM"),
            ("WND", "WND"),
        ),
    ),
    "0163": (
        "Administrative site",
        (
            ("BE", "BE"),
            ("BN", "BN"),
            ("BU", "BU"),
            ("CT", "CT"),
            ("LA", "LA"),
            ("LAC", "LAC"),
            ("LACF", "LACF"),
            ("LD", "LD"),
            ("LE", "LE"),
            ("LEJ", "LEJ"),
            ("LF", "LF"),
            ("LG", "LG"),
            ("LH", "LH"),
            ("LIJ", "LIJ"),
            ("LLAQ", "LLAQ"),
            ("LLFA", "LLFA"),
            ("LMFA", "LMFA"),
            ("LN", "LN"),
            ("LPC", "LPC"),
            ("LSC", "LSC"),
            ("LT", "LT"),
            ("LUA", "LUA"),
            ("LUAQ", "LUAQ"),
            ("LUFA", "LUFA"),
            ("LVG", "LVG"),
            ("LVL", "LVL"),
            ("NB", "NB"),
            ("OD", "OD"),
            ("OS", "OS"),
            ("OU", "OU"),
            ("PA", "PA"),
            ("PERIN", "PERIN"),
            ("RA", "RA"),
            ("RAC", "RAC"),
            ("RACF", "RACF"),
            ("RD", "RD"),
            ("RE", "RE"),
            ("REJ", "REJ"),
            ("RF", "RF"),
            ("RG", "RG"),
            ("RH", "RH"),
            ("RIJ", "RIJ"),
            ("RLAQ", "RLAQ"),
            ("RLFA", "RLFA"),
            ("RMFA", "RMFA"),
            ("RN", "RN"),
            ("RPC", "RPC"),
            ("RSC", "RSC"),
            ("RT", "RT"),
            ("RUA", "RUA"),
            ("RUAQ", "RUAQ"),
            ("RUFA", "RUFA"),
            ("RVG", "RVG"),
            ("RVL", "RVL"),
        ),
    ),
    "0164": (
        "Administration device",
        (
            ("AP", "AP"),
            ("BT", "BT"),
            ("HL", "HL"),
            ("IPPB", "IPPB"),
            ("IVP", "IVP"),
            ("IVS", "IVS"),
            ("MI", "MI"),
            ("NEB", "NEB"),
            ("PCA", "PCA"),
        ),
    ),
    "0165": (
        "Administration method",
        (
            ("CH", "CH"),
            ("DI", "DI"),
            ("DU", "DU"),
            ("IF", "IF"),
            ("IR", "IR"),
            ("IS", "IS"),
            ("IVP", "IVP"),
            ("IVPB", "IVPB"),
            ("NB", "NB"),
            ("PF", "PF"),
            ("PT", "PT"),
            ("SH", "SH"),
            ("SO", "SO"),
            ("WA", "WA"),
            ("WI", "WI"),
        ),
    ),
    "0166": ("RX component type", (("A", "A"), ("B", "B"))),
    "0167": (
        "Substitution status",
        (
            ("0", "No product selection indicated"),
            ("1", "Substitution not allowed by prescriber"),
            ("2", "Substitution allowed - patient requested product dispensed"),
            ("3", "Substitution allowed - pharmacist selected product dispensed"),
            ("4", "Substitution allowed - generic drug not in stock"),
            ("5", "Substitution allowed - brand drug dispensed as a generic"),
            ("7", "Substitution not allowed - brand drug mandated by law"),
            ("8", "Substitution allowed - generic drug not available in marketplace"),
            ("G", "A generic substitution was dispensed."),
            (
                "N",
                "No substitute was dispensed. This is equivalent to the default (null) value.",
            ),
            ("T", "A therapeutic substitution was dispensed."),
        ),
    ),
    "0168": (
        "Processing priority",
        (
            ("A", "A"),
            ("B", "B"),
            ("C", "C"),
            ("P", "P"),
            ("R", "R"),
            ("S", "S"),
            ("T", "T"),
        ),
    ),
    "0169": ("Reporting priority", (("C", "C"), ("R", "R"))),
    "0170": ("Derived specimen", (("C", "C"), ("N", "N"), ("P", "P"))),
    "0171": ("Citizenship", ()),
    "0172": ("Veterans Military Status", ()),
    "0173": ("Coordination of benefits", (("CO", "CO"), ("IN", "IN"))),
    "0174": (
        "Nature of test/observation",
        (("A", "A"), ("C", "C"), ("F", "F"), ("P", "P"), ("S", "S")),
    ),
    "0175": (
        "Master file identifier code",
        (
            ("CDM", "CDM"),
            ("CMA", "CMA"),
            ("CMB", "CMB"),
            ("LOC", "LOC"),
            ("OMA", "OMA"),
            ("OMB", "OMB"),
            ("OMC", "OMC"),
            ("OMD", "OMD"),
            ("PRA", "PRA"),
            ("STF", "STF"),
        ),
    ),
    "0177": (
        "Confidentiality code",
        (
            ("AID", "AID"),
            ("EMP", "EMP"),
            ("ETH", "ETH"),
            ("HIV", "HIV"),
            ("PSY", "PSY"),
            ("R", "R"),
            ("U", "U"),
            ("UWM", "UWM"),
            ("V", "V"),
            ("VIP", "VIP"),
        ),
    ),
    "0178": (
        "File level event code",
        (
            (
                "REP",
                "Replace current version of this master file with the version contained in this message",
            ),
            (
                "UPD",
                "Change file records as defined in the record-level event codes for each record that follows",
            ),
        ),
    ),
    "0179": (
        "Response level",
        (("AL", "AL"), ("ER", "ER"), ("NE", "NE"), ("SU", "SU")),
    ),
    "0180": (
        "Record-level event code",
        (
            ("MAC", "Reactivate deactivated record"),
            ("MAD", "Add record to master file"),
            (
                "MDC",
                "Deactivate: discontinue using record in master file, but do not delete from database",
            ),
            ("MDL", "Delete record for master file"),
            ("MUP", "Update record for master file"),
        ),
    ),
    "0181": ("MFN record-level error return", (("S", "S"), ("U", "U"))),
    "0182": ("Staff type", ()),
    "0183": ("Active/inactive", (("A", "A"), ("I", "I"))),
    "0184": ("Department", ()),
    "0185": (
        "Preferred method of contact",
        (("B", "B"), ("C", "C"), ("E", "E"), ("F", "F"), ("H", "H"), ("O", "O")),
    ),
    "0186": ("Practitioner Category", ()),
    "0187": (
        "Provider billing",
        (("I", "Institution bills for provider"), ("P", "Provider does own billing")),
    ),
    "0188": ("Operator ID", ()),
    "0189": (
        "Ethnic group",
        (
            ("...", "..."),
            ("H", "Hispanic or Latino"),
            ("N", "Not Hispanic or Latino"),
            ("U", "Unknown"),
        ),
    ),
    "0190": (
        "Address type",
        (
            ("B", "Firm/Business"),
            ("BA", "Bad address"),
            ("BDL", "Birth delivery location (address where birth occurred)"),
            ("BR", "Residence at birth (home address at time of birth)"),
            ("C", "Current Or Temporary"),
            ("F", "Country Of Origin"),
            ("H", "Home"),
            ("L", "Legal Address"),
            ("M", "Mailing"),
            ("N", "Birth (nee) (birth address, not otherwise specified)"),
            ("O", "Office"),
            ("P", "Permanent"),
            ("RH", "Registry home"),
        ),
    ),
    "0191": (
        "Type of referenced data",
        (
            ("AP", "Other application data, typically uninterpreted binary data"),
            ("Application", "Application"),
            ("AU", "Audio data"),
            ("Audio", "Audio"),
            ("FT", "Formatted text"),
            ("IM", "Image data"),
            ("Image", "Image"),
            ("NS", "Non-scanned image"),
            ("SD", "Scanned document"),
            ("SGML", "SGML"),
            ("SI", "Scanned image"),
            ("TEXT", "Machine readable text document"),
            ("TX", "Machine readable text document"),
        ),
    ),
    "0193": (
        "Amount class",
        (("AT", "Amount"), ("LM", "Limit"), ("PC", "Percentage"), ("UL", "Unlimited")),
    ),
    "0200": (
        "Name type",
        (
            ("A", "Alias Name"),
            ("B", "Name at Birth"),
            ("C", "Adopted Name"),
            ("D", "Display Name"),
            ("L", "Legal Name"),
            ("M", "Maiden Name"),
            ("P", "Name of Partner/Spouse"),
            ("S", "Coded Pseudo-Name to ensure anonymity"),
            ("T", "Indigenous/Tribal/Community Name"),
            ("U", "Unspecified"),
        ),
    ),
    "0201": (
        "Telecommunication use code",
        (
            ("ASN", "Answering Service Number"),
            ("BPN", "Beeper Number"),
            ("EMR", "Emergency Number"),
            ("NET", "Network (email) Address"),
            ("ORN", "Other Residence Number"),
            ("PRN", "Primary Residence Number"),
            ("VHN", "Vacation Home Number"),
            ("WPN", "Work Number"),
        ),
    ),
    "0202": (
        "Telecommunication equipment type",
        (
            ("BP", "Beeper"),
            ("CP", "Cellular Phone"),
            ("FX", "Fax"),
            (
                "Internet",
                "Internet Address: Use Only If Telecommunication Use Code Is NET",
            ),
            ("MD", "Modem"),
            ("PH", "Telephone"),
            (
                "X.400",
                "X.400 email address: Use Only If Telecommunication Use Code Is NET",
            ),
        ),
    ),
    "0203": (
        "Identifier type",
        (
            ("AM", "AM"),
            ("AN", "Account number"),
            ("BR", "Birth registry number"),
            ("DI", "DI"),
            ("DL", "Driver's license number"),
            ("DN", "Doctor number"),
            ("DS", "DS"),
            ("EI", "Employee number"),
            ("EN", "Employer number"),
            ("FI", "Facility ID"),
            ("GI", "Guarantor internal identifier"),
            ("GN", "Guarantor external identifier"),
            ("LN", "License number"),
            ("LR", "LR"),
            ("MA", "Patient Medicaid number"),
            ("MC", "Patient's Medicare number"),
            ("MR", "Medical record number"),
            ("MS", "MS"),
            ("NE", "NE"),
            ("NH", "NH"),
            ("NI", "National unique individual identifier"),
            ("NNxxx", "NNxxx"),
            ("NPI", "National provider identifier"),
            ("PI", "Patient internal identifier"),
            ("PN", "Person number"),
            ("PRN", "Provider number"),
            ("PT", "Patient external identifier"),
            ("RR", "RR"),
            ("RRI", "Regional registry ID"),
            ("SL", "SL"),
            ("SR", "SR"),
            ("SS", "Social Security number"),
            ("U", "Unspecified identifier"),
            (
                "UPIN",
                "Medicare/CMS (formerly HCFA)'s Universal Physician Identification numbers",
            ),
            ("VN", "Visit number"),
            ("VS", "VS"),
            ("WC", "WC"),
            ("XX", "XX"),
        ),
    ),
    "0204": (
        "Organizational name type",
        (("A", "A"), ("D", "D"), ("L", "L"), ("SL", "SL")),
    ),
    "0205": (
        "Price type",
        (
            ("AP", "Administrative price or handling fee"),
            ("DC", "Direct unit cost"),
            ("IC", "Indirect unit cost"),
            ("PF", "Professional fee for performing provider"),
            ("TF", "Technology fee for use of equipment"),
            ("TP", "Total price"),
            ("UP", "Unit price, may be based on length of procedure or service"),
        ),
    ),
    "0206": (
        "Segment action code",
        (("A", "Add/Insert"), ("D", "Delete"), ("U", "Update")),
    ),
    "0207": (
        "Processing mode",
        (
            ("A", "Archive"),
            ("I", "Initial load"),
            ("not present", "not present"),
            ("R", "Restore from archive"),
            (
                "T",
                "Current processing, transmitted at intervals (scheduled or on demand)",
            ),
        ),
    ),
    "0208": (
        "Query response status",
        (
            ("AE", "Application error"),
            ("AR", "Application reject"),
            ("NF", "No data found, no errors"),
            ("OK", "Data found, no errors (this is the default)"),
        ),
    ),
    "0209": (
        "Relational Operator",
        (
            ("CT", "Contains"),
            ("EQ", "Equal"),
            ("GE", "Greater than or equal"),
            ("GN", "Generic"),
            ("GT", "Greater than"),
            ("LE", "Less than or equal"),
            ("LT", "Less than"),
            ("NE", "Not Equal"),
        ),
    ),
    "0210": ("Relational Conjunction", (("AND", "Default"), ("OR", "Or"))),
    "0211": (
        "Alternate character sets",
        (
            ("8859/1", "The printable characters from the ISO 8859/1 Character set"),
            ("8859/2", "8859/2"),
            ("8859/3", "8859/3"),
            ("8859/4", "8859/4"),
            ("8859/5", "8859/5"),
            ("8859/6", "8859/6"),
            ("8859/7", "8859/7"),
            ("8859/8", "8859/8"),
            ("8859/9", "8859/9"),
            ("ASCII", "The printable 7-bit ASCII character set"),
            ("ISO IR14", "ISO IR14"),
            ("ISO IR159", "ISO IR159"),
            ("ISO IR87", "ISO IR87"),
            ("UNICODE", "The world wide character standard from ISO/IEC 10646-1-1993"),
        ),
    ),
    "0212": ("Nationality", ()),
    "0213": ("Purge status", (("D", "D"), ("I", "I"), ("P", "P"))),
    "0214": (
        "Special Program Code",
        (("CH", "CH"), ("ES", "ES"), ("FP", "FP"), ("O", "O"), ("U", "U")),
    ),
    "0215": ("Publicity Code", (("F", "F"), ("N", "N"), ("O", "O"), ("U", "U"))),
    "0216": ("Patient Status Code", (("AI", "AI"), ("DI", "DI"))),
    "0217": ("Visit priority code", (("1", "1"), ("2", "2"), ("3", "3"))),
    "0218": ("Patient Charge Adjustment", ()),
    "0219": ("Recurring Service Code", ()),
    "0220": (
        "Living arrangement",
        (("A", "A"), ("F", "F"), ("I", "I"), ("R", "R"), ("S", "S"), ("U", "U")),
    ),
    "0222": ("Contact Reason", ()),
    "0223": (
        "Living dependency",
        (("CB", "CB"), ("D", "D"), ("M", "M"), ("S", "S"), ("WU", "WU")),
    ),
    "0224": ("Transport arranged", (("A", "A"), ("N", "N"), ("U", "U"))),
    "0225": ("Escort required", (("N", "N"), ("R", "R"), ("U", "U"))),
    "0227": (
        "Manufacturers of vaccines (code=MVX)",
        (
            ("AB", "AB"),
            ("AD", "AD"),
            ("ALP", "ALP"),
            ("AR", "AR"),
            ("AVI", "AVI"),
            ("BA", "BA"),
            ("BAY", "BAY"),
            ("BP", "BP"),
            ("BPC", "BPC"),
            ("CEN", "CEN"),
            ("CHI", "CHI"),
            ("CON", "CON"),
            ("EVN", "EVN"),
            ("GRE", "GRE"),
            ("IAG", "IAG"),
            ("IM", "IM"),
            ("IUS", "IUS"),
            ("JPN", "JPN"),
            ("KGC", "KGC"),
            ("LED", "LED"),
            ("MA", "MA"),
            ("MED", "MED"),
            ("MIL", "MIL"),
            ("MIP", "MIP"),
            ("MSD", "MSD"),
            ("NAB", "NAB"),
            ("NAV", "NAV"),
            ("NOV", "NOV"),
            ("NYB", "NYB"),
            ("ORT", "ORT"),
            ("OTC", "OTC"),
            ("OTH", "OTH"),
            ("PD", "PD"),
            ("PMC", "PMC"),
            ("PRX", "PRX"),
            ("SCL", "SCL"),
            ("SI", "SI"),
            ("SKB", "SKB"),
            ("UNK", "UNK"),
            ("USA", "USA"),
            ("WA", "WA"),
            ("WAL", "WAL"),
        ),
    ),
    "0228": (
        "Diagnosis classification",
        (
            ("C", "C"),
            ("D", "D"),
            ("I", "I"),
            ("M", "M"),
            ("O", "O"),
            ("R", "R"),
            ("S", "S"),
            ("T", "T"),
        ),
    ),
    "0229": ("DRG payor", (("C", "C"), ("G", "G"), ("M", "M"))),
    "0230": (
        "Procedure functional type",
        (("A", "A"), ("D", "D"), ("I", "I"), ("P", "P")),
    ),
    "0231": ("Student status", (("F", "F"), ("N", "N"), ("P", "P"))),
    "0232": (
        "Insurance company contact reason",
        (("01", "01"), ("02", "02"), ("03", "03")),
    ),
    "0233": ("Non-Concur Code/Description", ()),
    "0234": (
        "Report timing",
        (
            ("10D", "10D"),
            ("15D", "15D"),
            ("30D", "30D"),
            ("3D", "3D"),
            ("7D", "7D"),
            ("AD", "AD"),
            ("CO", "CO"),
            ("DE", "DE"),
            ("PD", "PD"),
            ("RQ", "RQ"),
        ),
    ),
    "0235": (
        "Report source",
        (
            ("C", "C"),
            ("D", "D"),
            ("E", "E"),
            ("H", "H"),
            ("L", "L"),
            ("M", "M"),
            ("N", "N"),
            ("O", "O"),
            ("P", "P"),
            ("R", "R"),
        ),
    ),
    "0236": ("Event reported to", (("D", "D"), ("L", "L"), ("M", "M"), ("R", "R"))),
    "0237": (
        "Event qualification",
        (
            ("A", "A"),
            ("B", "B"),
            ("D", "D"),
            ("I", "I"),
            ("L", "L"),
            ("M", "M"),
            ("O", "O"),
            ("W", "W"),
        ),
    ),
    "0238": ("Event seriousness", (("N", "N"), ("S", "S"), ("Y", "Y"))),
    "0239": ("Event expected", (("N", "N"), ("U", "U"), ("Y", "Y"))),
    "0240": (
        "Event consequence",
        (
            ("C", "C"),
            ("D", "D"),
            ("H", "H"),
            ("I", "I"),
            ("J", "J"),
            ("L", "L"),
            ("O", "O"),
            ("P", "P"),
            ("R", "R"),
        ),
    ),
    "0241": (
        "Patient outcome",
        (
            ("D", "D"),
            ("F", "F"),
            ("N", "N"),
            ("R", "R"),
            ("S", "S"),
            ("U", "U"),
            ("W", "W"),
        ),
    ),
    "0242": (
        "Primary observer's qualification",
        (
            ("C", "C"),
            ("H", "H"),
            ("L", "L"),
            ("M", "M"),
            ("O", "O"),
            ("P", "P"),
            ("R", "R"),
        ),
    ),
    "0243": ("Identity may be divulged", (("N", "N"), ("NA", "NA"), ("Y", "Y"))),
    "0244": ("Single Use Device", ()),
    "0245": ("Product Problem", ()),
    "0246": ("Product Available for Inspection", ()),
    "0247": (
        "Status of evaluation",
        (
            ("A", "A"),
            ("C", "C"),
            ("D", "D"),
            ("I", "I"),
            ("K", "K"),
            ("O", "O"),
            ("P", "P"),
            ("Q", "Q"),
            ("R", "R"),
            ("U", "U"),
            ("X", "X"),
            ("Y", "Y"),
        ),
    ),
    "0248": ("Product source", (("A", "A"), ("L", "L"), ("N", "N"), ("R", "R"))),
    "0249": ("Generic Product", ()),
    "0250": (
        "Relatedness assessment",
        (("H", "H"), ("I", "I"), ("M", "M"), ("N", "N"), ("S", "S")),
    ),
    "0251": (
        "Action taken in response to the event",
        (
            ("DI", "DI"),
            ("DR", "DR"),
            ("N", "N"),
            ("OT", "OT"),
            ("WP", "WP"),
            ("WT", "WT"),
        ),
    ),
    "0252": (
        "Causality observations",
        (
            ("AW", "AW"),
            ("BE", "BE"),
            ("DR", "DR"),
            ("EX", "EX"),
            ("IN", "IN"),
            ("LI", "LI"),
            ("OE", "OE"),
            ("OT", "OT"),
            ("PL", "PL"),
            ("SE", "SE"),
            ("TC", "TC"),
        ),
    ),
    "0253": (
        "Indirect exposure mechanism",
        (("B", "B"), ("F", "F"), ("O", "O"), ("P", "P"), ("X", "X")),
    ),
    "0254": (
        "Kind of quantity",
        (
            ("ABS", "ABS"),
            ("ACNC", "ACNC"),
            ("ACT", "ACT"),
            ("APER", "APER"),
            ("ARB", "ARB"),
            ("AREA", "AREA"),
            ("ASPECT", "ASPECT"),
            ("CACT", "CACT"),
            ("CCNT", "CCNT"),
            ("CCRTO", "CCRTO"),
            ("CFR", "CFR"),
            ("CLAS", "CLAS"),
            ("CNC", "CNC"),
            ("CNST", "CNST"),
            ("COEF", "COEF"),
            ("COLOR", "COLOR"),
            ("CONS", "CONS"),
            ("CRAT", "CRAT"),
            ("CRTO", "CRTO"),
            ("DEN", "DEN"),
            ("DEV", "DEV"),
            ("DIFF", "DIFF"),
            ("ELAS", "ELAS"),
            ("ELPOT", "ELPOT"),
            ("ELRAT", "ELRAT"),
            ("ELRES", "ELRES"),
            ("ENGR", "ENGR"),
            ("ENT", "ENT"),
            ("ENTCAT", "ENTCAT"),
            ("ENTNUM", "ENTNUM"),
            ("ENTSUB", "ENTSUB"),
            ("ENTVOL", "ENTVOL"),
            ("EQL", "EQL"),
            ("FORCE", "FORCE"),
            ("FREQ", "FREQ"),
            ("IMP", "IMP"),
            ("KINV", "KINV"),
            ("LEN", "LEN"),
            ("LINC", "LINC"),
            ("LIQ", "LIQ"),
            ("MASS", "MASS"),
            ("MCNC", "MCNC"),
            ("MCNT", "MCNT"),
            ("MCRTO", "MCRTO"),
            ("MFR", "MFR"),
            ("MGFLUX", "MGFLUX"),
            ("MINC", "MINC"),
            ("MORPH", "MORPH"),
            ("MOTIL", "MOTIL"),
            ("MRAT", "MRAT"),
            ("MRTO", "MRTO"),
            ("NCNC", "NCNC"),
            ("NCNT", "NCNT"),
            ("NFR", "NFR"),
            ("NRTO", "NRTO"),
            ("NUM", "NUM"),
            ("OD", "OD"),
            ("OSMOL", "OSMOL"),
            ("PRES", "PRES"),
            ("PRID", "PRID"),
            ("PWR", "PWR"),
            ("RANGE", "RANGE"),
            ("RATIO", "RATIO"),
            ("RCRLTM", "RCRLTM"),
            ("RDEN", "RDEN"),
            ("REL", "REL"),
            ("RLMCNC", "RLMCNC"),
            ("RLSCNC", "RLSCNC"),
            ("RLTM", "RLTM"),
            ("SATFR", "SATFR"),
            ("SCNC", "SCNC"),
            ("SCNCIN", "SCNCIN"),
            ("SCNT", "SCNT"),
            ("SCNTR", "SCNTR"),
            ("SCRTO", "SCRTO"),
            ("SFR", "SFR"),
            ("SHAPE", "SHAPE"),
            ("SMELL", "SMELL"),
            ("SRAT", "SRAT"),
            ("SRTO", "SRTO"),
            ("SUB", "SUB"),
            ("SUSC", "SUSC"),
            ("TASTE", "TASTE"),
            ("TEMP", "TEMP"),
            ("TEMPDF", "TEMPDF"),
            ("TEMPIN", "TEMPIN"),
            ("THRMCNC", "THRMCNC"),
            ("THRSCNC", "THRSCNC"),
            ("TIME", "TIME"),
            ("TITR", "TITR"),
            ("TMDF", "TMDF"),
            ("TMSTP", "TMSTP"),
            ("TRTO", "TRTO"),
            ("TYPE", "TYPE"),
            ("VCNT", "VCNT"),
            ("VEL", "VEL"),
            ("VELRT", "VELRT"),
            ("VFR", "VFR"),
            ("VISC", "VISC"),
            ("VOL", "VOL"),
            ("VRAT", "VRAT"),
            ("VRTO", "VRTO"),
        ),
    ),
    "0255": (
        "Duration categories",
        (
            ("12H", "12H"),
            ("1H", "1H"),
            ("1L", "1L"),
            ("1W", "1W"),
            ("24H", "24H"),
            ("2.5H", "2.5H"),
            ("2D", "2D"),
            ("2H", "2H"),
            ("2L", "2L"),
            ("2W", "2W"),
            ("30M", "30M"),
            ("3D", "3D"),
            ("3H", "3H"),
            ("3L", "3L"),
            ("3W", "3W"),
            ("4D", "4D"),
            ("4H", "4H"),
            ("4W", "4W"),
            ("5D", "5D"),
            ("5H", "5H"),
            ("6D", "6D"),
            ("6H", "6H"),
            ("7H", "7H"),
            ("8H", "8H"),
            ("PT", "PT"),
            ("* (star)", "* (star)"),
        ),
    ),
    "0256": (
        "Time delay post challenge",
        (
            ("10D", "10D"),
            ("10M", "10M"),
            ("12H", "12H"),
            ("15M", "15M"),
            ("1H", "1H"),
            ("1L", "1L"),
            ("1M", "1M"),
            ("1W", "1W"),
            ("20M", "20M"),
            ("24H", "24H"),
            ("2.5H", "2.5H"),
            ("25M", "25M"),
            ("2D", "2D"),
            ("2H", "2H"),
            ("2L", "2L"),
            ("2M", "2M"),
            ("2W", "2W"),
            ("30M", "30M"),
            ("3D", "3D"),
            ("3H", "3H"),
            ("3L", "3L"),
            ("3M", "3M"),
            ("3W", "3W"),
            ("4D", "4D"),
            ("4H", "4H"),
            ("4M", "4M"),
            ("4W", "4W"),
            ("5D", "5D"),
            ("5H", "5H"),
            ("5M", "5M"),
            ("6D", "6D"),
            ("6H", "6H"),
            ("6M", "6M"),
            ("7D", "7D"),
            ("7H", "7H"),
            ("7M", "7M"),
            ("8H", "8H"),
            ("8H SHIFT", "8H SHIFT"),
            ("8M", "8M"),
            ("9M", "9M"),
            ("BS", "BS"),
            ("PEAK", "PEAK"),
            ("RANDOM", "RANDOM"),
            ("TROUGH", "TROUGH"),
        ),
    ),
    "0257": (
        "Nature of challenge",
        (("CFST", "CFST"), ("EXCZ", "EXCZ"), ("FFST", "FFST")),
    ),
    "0258": (
        "Relationship modifier",
        (
            ("BPU", "BPU"),
            ("CONTROL", "CONTROL"),
            ("DONOR", "DONOR"),
            ("PATIENT", "PATIENT"),
        ),
    ),
    "0259": (
        "Modality",
        (
            ("AS", "AS"),
            ("BS", "BS"),
            ("CD", "CD"),
            ("CP", "CP"),
            ("CR", "CR"),
            ("CS", "CS"),
            ("CT", "CT"),
            ("DD", "DD"),
            ("DG", "DG"),
            ("DM", "DM"),
            ("EC", "EC"),
            ("ES", "ES"),
            ("FA", "FA"),
            ("FS", "FS"),
            ("LP", "LP"),
            ("LS", "LS"),
            ("MA", "MA"),
            ("MS", "MS"),
            ("NM", "NM"),
            ("OT", "OT"),
            ("PT", "PT"),
            ("RF", "RF"),
            ("ST", "ST"),
            ("TG", "TG"),
            ("US", "US"),
            ("XA", "XA"),
        ),
    ),
    "0260": (
        "Patient location type",
        (
            ("B", "B"),
            ("C", "C"),
            ("D", "D"),
            ("E", "E"),
            ("L", "L"),
            ("N", "N"),
            ("O", "O"),
            ("R", "R"),
        ),
    ),
    "0261": (
        "Location equipment",
        (
            ("EEG", "EEG"),
            ("EKG", "EKG"),
            ("INF", "INF"),
            ("IVP", "IVP"),
            ("OXY", "OXY"),
            ("SUC", "SUC"),
            ("VEN", "VEN"),
            ("VIT", "VIT"),
        ),
    ),
    "0262": (
        "Privacy level",
        (("F", "F"), ("J", "J"), ("P", "P"), ("Q", "Q"), ("S", "S"), ("W", "W")),
    ),
    "0263": (
        "Level of care",
        (
            ("A", "A"),
            ("C", "C"),
            ("E", "E"),
            ("F", "F"),
            ("N", "N"),
            ("R", "R"),
            ("S", "S"),
        ),
    ),
    "0264": ("Location Department", ()),
    "0265": (
        "Specialty type",
        (
            ("ALC", "ALC"),
            ("AMB", "AMB"),
            ("CAN", "CAN"),
            ("CAR", "CAR"),
            ("CCR", "CCR"),
            ("CHI", "CHI"),
            ("EDI", "EDI"),
            ("EMR", "EMR"),
            ("FPC", "FPC"),
            ("INT", "INT"),
            ("ISO", "ISO"),
            ("NAT", "NAT"),
            ("NBI", "NBI"),
            ("OBG", "OBG"),
            ("OBS", "OBS"),
            ("OTH", "OTH"),
            ("PED", "PED"),
            ("PHY", "PHY"),
            ("PIN", "PIN"),
            ("PPS", "PPS"),
            ("PRE", "PRE"),
            ("PSI", "PSI"),
            ("PSY", "PSY"),
            ("REH", "REH"),
            ("SUR", "SUR"),
            ("WIC", "WIC"),
        ),
    ),
    "0267": (
        "Days of the Week",
        (
            ("FRI", "Friday"),
            ("MON", "Monday"),
            ("SAT", "Saturday"),
            ("SUN", "Sunday"),
            ("THU", "Thursday"),
            ("TUE", "Tuesday"),
            ("WED", "Wednesday"),
        ),
    ),
    "0268": ("Override", (("A", "A"), ("R", "R"), ("X", "X"))),
    "0269": ("Charge on indicator", (("O", "O"), ("R", "R"))),
    "0270": (
        "Document type",
        (
            ("AR", "AR"),
            ("CD", "CD"),
            ("CN", "CN"),
            ("DI", "DI"),
            ("DS", "DS"),
            ("ED", "ED"),
            ("HP", "HP"),
            ("OP", "OP"),
            ("PC", "PC"),
            ("PH", "PH"),
            ("PN", "PN"),
            ("PR", "PR"),
            ("SP", "SP"),
            ("TS", "TS"),
        ),
    ),
    "0271": (
        "Document completion status",
        (
            ("AU", "AU"),
            ("DI", "DI"),
            ("DO", "DO"),
            ("IN", "IN"),
            ("IP", "IP"),
            ("LA", "LA"),
            ("PA", "PA"),
        ),
    ),
    "0272": ("Document confidentiality status", (("R", "R"), ("U", "U"), ("V", "V"))),
    "0273": (
        "Document availability status",
        (("AV", "AV"), ("CA", "CA"), ("OB", "OB"), ("UN", "UN")),
    ),
    "0275": (
        "Document storage status",
        (("AA", "AA"), ("AC", "AC"), ("AR", "AR"), ("PU", "PU")),
    ),
    "0276": (
        "Appointment reason codes",
        (
            ("CHECKUP", "CHECKUP"),
            ("EMERGENCY", "EMERGENCY"),
            ("FOLLOWUP", "FOLLOWUP"),
            ("ROUTINE", "ROUTINE"),
            ("WALKIN", "WALKIN"),
        ),
    ),
    "0277": (
        "Appointment type codes",
        (("Complete", "Complete"), ("Normal", "Normal"), ("Tentative", "Tentative")),
    ),
    "0278": (
        "Filler status codes",
        (
            ("Blocked", "Blocked"),
            ("Booked", "Booked"),
            ("Cancelled", "Cancelled"),
            ("Complete", "Complete"),
            ("Dc", "Dc"),
            ("Deleted", "Deleted"),
            ("Overbook", "Overbook"),
            ("Pending", "Pending"),
            ("Started", "Started"),
            ("Waitlist", "Waitlist"),
        ),
    ),
    "0279": (
        "Allow substitution codes",
        (("Confirm", "Confirm"), ("No", "No"), ("Notify", "Notify"), ("Yes", "Yes")),
    ),
    "0280": ("Referral priority", (("A", "A"), ("R", "R"), ("S", "S"))),
    "0281": (
        "Referral type",
        (
            ("Hom", "Hom"),
            ("Lab", "Lab"),
            ("Med", "Med"),
            ("Psy", "Psy"),
            ("Rad", "Rad"),
            ("Skn", "Skn"),
        ),
    ),
    "0282": (
        "Referral disposition",
        (("AM", "AM"), ("RP", "RP"), ("SO", "SO"), ("WR", "WR")),
    ),
    "0283": ("Referral Status", (("A", "A"), ("E", "E"), ("P", "P"), ("R", "R"))),
    "0284": ("Referral category", (("A", "A"), ("E", "E"), ("I", "I"), ("O", "O"))),
    "0285": ("Insurance Company ID Codes", ()),
    "0286": ("Provider role", (("CP", "CP"), ("PP", "PP"), ("RP", "RP"), ("RT", "RT"))),
    "0287": (
        "Problem/Goal Action code",
        (
            ("AD", "AD"),
            ("CO", "CO"),
            ("DE", "DE"),
            ("LI", "LI"),
            ("UC", "UC"),
            ("UN", "UN"),
            ("UP", "UP"),
        ),
    ),
    "0289": ("County/Parish", ()),
    "0291": (
        "Subtype of referenced data",
        (
            ("BASIC", "BASIC"),
            ("DICOM", "DICOM"),
            ("FAX", "FAX"),
            ("GIF", "GIF"),
            ("HTML", "HTML"),
            ("JOT", "JOT"),
            ("JPEG", "JPEG"),
            ("Octet-stream", "Octet-stream"),
            ("PICT", "PICT"),
            ("PostScript", "PostScript"),
            ("RTF", "RTF"),
            ("SGML", "SGML"),
            ("TIFF", "TIFF"),
            ("XML", "XML"),
        ),
    ),
    "0292": (
        "Vaccines administered (code = CVX)(parenteral, unless oral is noted)",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("07", "07"),
            ("08", "08"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("13", "13"),
            ("14", "14"),
            ("15", "15"),
            ("16", "16"),
            ("17", "17"),
            ("18", "18"),
            ("19", "19"),
            ("20", "20"),
            ("21", "21"),
            ("22", "22"),
            ("23", "23"),
            ("24", "24"),
            ("25", "25"),
            ("26", "26"),
            ("27", "27"),
            ("28", "28"),
            ("29", "29"),
            ("30", "30"),
            ("31", "31"),
            ("32", "32"),
            ("33", "33"),
            ("34", "34"),
            ("35", "35"),
            ("36", "36"),
            ("37", "37"),
            ("38", "38"),
            ("39", "39"),
            ("40", "40"),
            ("41", "41"),
            ("42", "42"),
            ("43", "43"),
            ("44", "44"),
            ("45", "45"),
            ("46", "46"),
            ("47", "47"),
            ("48", "48"),
            ("49", "49"),
            ("50", "50"),
            ("51", "51"),
            ("52", "52"),
            ("53", "53"),
            ("54", "54"),
            ("55", "55"),
            ("56", "56"),
            ("57", "57"),
            ("58", "58"),
            ("59", "59"),
            ("60", "60"),
            ("61", "61"),
            ("62", "62"),
            ("63", "63"),
            ("64", "64"),
            ("65", "65"),
            ("66", "66"),
            ("67", "67"),
            ("68", "68"),
            ("69", "69"),
            ("70", "70"),
            ("71", "71"),
            ("72", "72"),
            ("73", "73"),
            ("74", "74"),
            ("75", "75"),
            ("76", "76"),
            ("77", "77"),
            ("78", "78"),
            ("79", "79"),
            ("80", "80"),
            ("81", "81"),
            ("82", "82"),
            ("83", "83"),
            ("84", "84"),
            ("85", "85"),
            ("86", "86"),
            ("87", "87"),
            ("88", "88"),
            ("89", "89"),
            ("90", "90"),
            ("91", "91"),
            ("92", "92"),
        ),
    ),
    "0293": ("Billing Category", ()),
    "0294": (
        "Time selection criteria parameter class codes",
        (
            ("FRI", "FRI"),
            ("MON", "MON"),
            ("PREFEND", "PREFEND"),
            ("PREFSTART", "PREFSTART"),
            ("SAT", "SAT"),
            ("SUN", "SUN"),
            ("THU", "THU"),
            ("TUE", "TUE"),
            ("WED", "WED"),
        ),
    ),
    "0295": ("Handicap", ()),
    "0296": ("Primary Language", ()),
    "0298": ("CP range type", (("F", "F"), ("P", "P"))),
    "0299": ("Encoding", (("A", "A"), ("Base64", "Base64"), ("Hex", "Hex"))),
    "0300": ("Namespace ID", ()),
    "0301": (
        "Universal ID type",
        (
            ("DNS", "An Internet dotted name"),
            ("GUID", "Same as UUID"),
            ("HCD", "The CEN Healthcare Coding Scheme Designator"),
            ("HL7", "Reserved for future HL7 registration schemes"),
            ("ISO", "An International Standards Organization Object Identifier"),
            ("L,M,N", "L,M,N"),
            ("Random", "Usually a base64 encoded string of random bits"),
            ("UUID", "The DCE Universal Unique Identifier"),
            ("x400", "An X.400 MHS format identifier"),
            ("x500", "An X.500 directory name"),
        ),
    ),
    "0309": (
        "Coverage type",
        (
            ("B", "Both hospital and physician"),
            ("H", "Hospital/institutional"),
            ("P", "Physician/professional"),
        ),
    ),
    "0311": ("Job status", (("O", "O"), ("P", "P"), ("T", "T"), ("U", "U"))),
    "0312": ("Policy Scope", ()),
    "0313": ("Policy Source", ()),
    "0315": (
        "Living will",
        (("F", "F"), ("I", "I"), ("N", "N"), ("U", "U"), ("Y", "Y")),
    ),
    "0316": ("Organ donor", (("F", "F"), ("I", "I"), ("U", "U"), ("Y", "Y"))),
    "0317": (
        "Annotations",
        (
            ("9900", "9900"),
            ("9901", "9901"),
            ("9902", "9902"),
            ("9903", "9903"),
            ("9904", "9904"),
        ),
    ),
    "0319": ("Department Cost Center", ()),
    "0320": ("Item Natural Account Code", ()),
    "0321": (
        "Dispense method",
        (
            ("AD", "Automatic Dispensing"),
            ("F", "Floor Stock"),
            ("TR", "Traditional"),
            ("UD", "Unit Dose"),
        ),
    ),
    "0322": (
        "Completion status",
        (
            ("CP", "Complete"),
            ("NA", "Not Administered"),
            ("PA", "Partially Administered"),
            ("RE", "Refused"),
        ),
    ),
    "0323": ("Action code", (("A", "Add/Insert"), ("D", "Delete"), ("U", "Update"))),
    "0324": (
        "Location characteristic ID",
        (
            ("GEN", "GEN"),
            ("IMP", "IMP"),
            ("INF", "INF"),
            ("LCR", "LCR"),
            ("LIC", "LIC"),
            ("OVR", "OVR"),
            ("PRL", "PRL"),
            ("SET", "SET"),
            ("SHA", "SHA"),
            ("SMK", "SMK"),
            ("STF", "STF"),
            ("TEA", "TEA"),
        ),
    ),
    "0325": (
        "Location relationship ID",
        (
            ("ALI", "ALI"),
            ("DTY", "DTY"),
            ("LAB", "LAB"),
            ("LB2", "LB2"),
            ("PAR", "PAR"),
            ("RX", "RX"),
            ("RX2", "RX2"),
        ),
    ),
    "0326": ("Visit indicator", (("A", "A"), ("V", "V"))),
    "0327": ("Job Code", ()),
    "0328": ("Employee Classification", ()),
    "0329": ("Quantity method", (("A", "A"), ("E", "E"))),
    "0330": (
        "Marketing basis",
        (
            ("510E", "510E"),
            ("510K", "510K"),
            ("522S", "522S"),
            ("PMA", "PMA"),
            ("PRE", "PRE"),
            ("TXN", "TXN"),
        ),
    ),
    "0331": ("Facility type", (("A", "A"), ("D", "D"), ("M", "M"), ("U", "U"))),
    "0333": ("Network change type", (("M", "M"), ("SD", "SD"), ("SU", "SU"))),
    "0334": (
        "Disabled person",
        (("AP", "AP"), ("GT", "GT"), ("IN", "IN"), ("PT", "PT")),
    ),
    "0336": ("Referral reason", (("O", "O"), ("P", "P"), ("S", "S"), ("W", "W"))),
    "0337": ("Certification Status", (("C", "C"), ("E", "E"))),
    "0338": (
        "Practitioner ID number type",
        (
            ("CY", "County number"),
            ("DEA", "Drug Enforcement Agency no."),
            ("GL", "General ledger number"),
            ("L&I", "Labor and industries number"),
            ("MCD", "Medicaid number"),
            ("MCR", "Medicare number"),
            ("QA", "QA number"),
            ("SL", "State license number"),
            ("TAX", "Tax ID number"),
            ("TRL", "Training license number"),
            ("UPIN", "Unique physician ID no."),
        ),
    ),
    "0339": (
        "Advanced Beneficiary Notice Code",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4")),
    ),
    "0340": ("Procedure Code Modifier", ()),
    "0341": ("Guarantor Credit Rating Code", ()),
    "0342": ("Military Recipient", ()),
    "0343": ("Military Handicapped Program Code", ()),
    "0344": (
        "Patient's relationship to insured",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("07", "07"),
            ("08", "08"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("13", "13"),
            ("14", "14"),
            ("15", "15"),
            ("16", "16"),
            ("17", "17"),
            ("18", "18"),
            ("19", "19"),
        ),
    ),
    "0345": ("Appeal Reason", ()),
    "0346": ("Certification Agency", ()),
    "0347": ("State/province", (("AB", "AB"), ("MI", "MI"))),
    "0348": (
        "Special program indicator",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("07", "07"),
            ("08", "08"),
        ),
    ),
    "0349": (
        "PSRO/UR approval indicator",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5")),
    ),
    "0350": (
        "Occurrence code",
        (
            ("01", "01"),
            ("02", "02"),
            ("03", "03"),
            ("04", "04"),
            ("05", "05"),
            ("06", "06"),
            ("09", "09"),
            ("10", "10"),
            ("11", "11"),
            ("12", "12"),
            ("17", "17"),
            ("18", "18"),
            ("19", "19"),
            ("20", "20"),
            ("21", "21"),
            ("22", "22"),
            ("24", "24"),
            ("25", "25"),
            ("26", "26"),
            ("27", "27"),
            ("28", "28"),
            ("29", "29"),
            ("30", "30"),
            ("31", "31"),
            ("32", "32"),
            ("33", "33"),
            ("34", "34"),
            ("35", "35"),
            ("36", "36"),
            ("37", "37"),
            ("40", "40"),
            ("41", "41"),
            ("42", "42"),
            ("43", "43"),
            ("44", "44"),
            ("45", "45"),
            ("46", "46"),
            ("47 ... 49", "47 ... 49"),
            ("50", "50"),
            ("51", "51"),
            ("70 ... 99", "70 ... 99"),
            ("A1", "A1"),
            ("A2", "A2"),
            ("A3", "A3"),
        ),
    ),
    "0351": (
        "Occurrence span",
        (
            ("70", "70"),
            ("71", "71"),
            ("72", "72"),
            ("73", "73"),
            ("74", "74"),
            ("75", "75"),
            ("76", "76"),
            ("77", "77"),
            ("78", "78"),
            ("79", "79"),
            ("M0", "M0"),
        ),
    ),
    "0353": (
        "CWE statuses",
        (
            ("NA", "Not applicable"),
            ("NASK", "Not asked"),
            ("NAV", "Temporarily unavailable"),
            ("U", "Unknown"),
            ("UASK", "UASK"),
        ),
    ),
    "0354": (
        "Message structure",
        (
            ("ACK", "ACK"),
            ("ADT_A01", "ADT_A01"),
            ("ADT_A02", "ADT_A02"),
            ("ADT_A03", "ADT_A03"),
            ("ADT_A06", "ADT_A06"),
            ("ADT_A09", "ADT_A09"),
            ("ADT_A12", "ADT_A12"),
            ("ADT_A16", "ADT_A16"),
            ("ADT_A17", "ADT_A17"),
            ("ADT_A18", "ADT_A18"),
            ("ADT_A20", "ADT_A20"),
            ("ADT_A24", "ADT_A24"),
            ("ADT_A28", "ADT_A28"),
            ("ADT_A30", "ADT_A30"),
            ("ADT_A37", "ADT_A37"),
            ("ADT_A38", "ADT_A38"),
            ("ADT_A39", "ADT_A39"),
            ("ADT_A43", "ADT_A43"),
            ("ADT_A45", "ADT_A45"),
            ("ADT_A50", "ADT_A50"),
            ("ARD_A19", "ARD_A19"),
            ("BAR_P01", "BAR_P01"),
            ("BAR_P02", "BAR_P02"),
            ("BAR_P06", "BAR_P06"),
            ("CRM_C01", "CRM_C01"),
            ("CSU_C09", "CSU_C09"),
            ("DFT_P03", "DFT_P03"),
            ("DOC_T12", "DOC_T12"),
            ("DSR_Q01", "DSR_Q01"),
            ("DSR_Q03", "DSR_Q03"),
            ("EDR_R07", "EDR_R07"),
            ("EQQ_Q04", "EQQ_Q04"),
            ("ERP_R09", "ERP_R09"),
            ("MDM_T01", "MDM_T01"),
            ("MDM_T02", "MDM_T02"),
            ("MFD_P09", "MFD_P09"),
            ("MFK_M01", "MFK_M01"),
            ("MFN_M01", "MFN_M01"),
            ("MFN_M02", "MFN_M02"),
            ("MFN_M03", "MFN_M03"),
            ("MFN_M05", "MFN_M05"),
            ("MFN_M06", "MFN_M06"),
            ("MFN_M07", "MFN_M07"),
            ("MFN_M08", "MFN_M08"),
            ("MFN_M09", "MFN_M09"),
            ("MFN_M10", "MFN_M10"),
            ("MFN_M11", "MFN_M11"),
            ("NUL", "NUL"),
            ("OMD_O01", "OMD_O01"),
            ("OMN_O01", "OMN_O01"),
            ("OMS_O01", "OMS_O01"),
            ("ORD_O02", "ORD_O02"),
            ("ORF_R02", "ORF_R02"),
            ("ORM_O01", "ORM_O01"),
            ("ORM_Q06", "ORM_Q06"),
            ("ORN_O02", "ORN_O02"),
            ("ORR_O02", "ORR_O02"),
            ("ORR_Q06", "ORR_Q06"),
            ("ORS_O02", "ORS_O02"),
            ("ORU_R01", "ORU_R01"),
            ("ORU_W01", "ORU_W01"),
            ("OSQ_Q06", "OSQ_Q06"),
            ("OSR_Q06", "OSR_Q06"),
            ("PEX_P07", "PEX_P07"),
            ("PGL_PC6", "PGL_PC6"),
            ("PIN_I07", "PIN_I07"),
            ("PPG_PCG", "PPG_PCG"),
            ("PPP_PCB", "PPP_PCB"),
            ("PPR_PC1", "PPR_PC1"),
            ("PPT_PCL", "PPT_PCL"),
            ("PPV_PCA", "PPV_PCA"),
            ("PRR_PC5", "PRR_PC5"),
            ("PTR_PCF", "PTR_PCF"),
            ("QCK_Q02", "QCK_Q02"),
            ("QRY_A19", "QRY_A19"),
            ("QRY_PC4", "QRY_PC4"),
            ("QRY_Q01", "QRY_Q01"),
            ("QRY_Q02", "QRY_Q02"),
            ("QRY_R02", "QRY_R02"),
            ("QRY_T12", "QRY_T12"),
            ("RAR_RAR", "RAR_RAR"),
            ("RAS_O01", "RAS_O01"),
            ("RAS_O02", "RAS_O02"),
            ("RCI_I05", "RCI_I05"),
            ("RCL_I06", "RCL_I06"),
            ("RDE_O01", "RDE_O01"),
            ("RDO_O01", "RDO_O01"),
            ("RDR_RDR", "RDR_RDR"),
            ("RDS_O01", "RDS_O01"),
            ("REF_I12", "REF_I12"),
            ("RER_RER", "RER_RER"),
            ("RGR_RGR", "RGR_RGR"),
            ("RGV_O01", "RGV_O01"),
            ("ROR_ROR", "ROR_ROR"),
            ("RPA_I08", "RPA_I08"),
            ("RPI_I0I", "RPI_I0I"),
            ("RPL_I02", "RPL_I02"),
            ("RPR_I03", "RPR_I03"),
            ("RQA_I08", "RQA_I08"),
            ("RQC_I05", "RQC_I05"),
            ("RQC_I06", "RQC_I06"),
            ("RQI_I0I", "RQI_I0I"),
            ("RQP_I04", "RQP_I04"),
            ("RQQ_Q09", "RQQ_Q09"),
            ("RRA_O02", "RRA_O02"),
            ("RRD_O02", "RRD_O02"),
            ("RRE_O02", "RRE_O02"),
            ("RRG_O02", "RRG_O02"),
            ("RRI_I12", "RRI_I12"),
            ("RRO_O02", "RRO_O02"),
            ("SIU_S12", "SIU_S12"),
            ("SPQ_Q08", "SPQ_Q08"),
            ("SQM_S25", "SQM_S25"),
            ("SQR_S25", "SQR_S25"),
            ("SRM_S01", "SRM_S01"),
            ("SRM_T12", "SRM_T12"),
            ("SRR_S01", "SRR_S01"),
            ("SRR_T12", "SRR_T12"),
            ("SUR_P09", "SUR_P09"),
            ("TBR_R09", "TBR_R09"),
            ("UDM_Q05", "UDM_Q05"),
            ("VQQ_Q07", "VQQ_Q07"),
            ("VXQ_V01", "VXQ_V01"),
            ("VXR_V03", "VXR_V03"),
            ("VXU_V04", "VXU_V04"),
            ("VXX_V02", "VXX_V02"),
        ),
    ),
    "0355": ("Primary key value type", (("CE", "CE"), ("PL", "PL"))),
    "0356": (
        "Alternate character set handling scheme",
        (("ISO 2022-199", "ISO 2022-199"), ("<null>", "<null>")),
    ),
    "0357": (
        "Message error condition  codes",
        (
            ("0", "Message accepted"),
            ("100", "Segment sequence error"),
            ("101", "Required field missing"),
            ("102", "Data type error"),
            ("103", "Table value not found"),
            ("200", "Unsupported message type"),
            ("201", "Unsupported event code"),
            ("202", "Unsupported processing id"),
            ("203", "Unsupported version id"),
            ("204", "Unknown key identifier"),
            ("205", "Duplicate key identifier"),
            ("206", "Application record locked"),
            ("207", "Application internal error"),
        ),
    ),
    "0358": ("Practitioner Group", ()),
    "0359": (
        "Diagnosis priority",
        (("0", "0"), ("1", "1"), ("2 and higher", "2 and higher")),
    ),
    "0360": (
        "Degree",
        (
            ("AA", "AA"),
            ("AAS", "AAS"),
            ("ABA", "ABA"),
            ("AE", "AE"),
            ("AS", "AS"),
            ("BA", "BA"),
            ("BBA", "BBA"),
            ("BE", "BE"),
            ("BFA", "BFA"),
            ("BN", "BN"),
            ("BS", "BS"),
            ("BSL", "BSL"),
            ("BT", "BT"),
            ("CER", "CER"),
            ("DBA", "DBA"),
            ("DED", "DED"),
            ("DIP", "DIP"),
            ("DO", "DO"),
            ("HS", "HS"),
            ("JD", "JD"),
            ("MA", "MA"),
            ("MBA", "MBA"),
            ("MCE", "MCE"),
            ("MD", "MD"),
            ("MDI", "MDI"),
            ("ME", "ME"),
            ("MED", "MED"),
            ("MEE", "MEE"),
            ("MFA", "MFA"),
            ("MME", "MME"),
            ("MS", "MS"),
            ("MSL", "MSL"),
            ("MT", "MT"),
            ("NG", "NG"),
            ("PHD", "PHD"),
            ("PHE", "PHE"),
            ("PHS", "PHS"),
            ("SEC", "SEC"),
            ("TS", "TS"),
        ),
    ),
    "0361": ("Application", ()),
    "0362": ("Facility", ()),
    "0363": (
        "Assigning authority",
        (
            ("AUSDVA", "AUSDVA"),
            ("AUSHIC", "AUSHIC"),
            ("CANAB", "CANAB"),
            ("CANBC", "CANBC"),
            ("CANMB", "CANMB"),
            ("CANNB", "CANNB"),
            ("CANNF", "CANNF"),
            ("CANNS", "CANNS"),
            ("CANNT", "CANNT"),
            ("CANNU", "CANNU"),
            ("CANON", "CANON"),
            ("CANPE", "CANPE"),
            ("CANQC", "CANQC"),
            ("CANSK", "CANSK"),
            ("CANYT", "CANYT"),
            ("NLVWS", "NLVWS"),
            ("USCDC", "USCDC"),
            ("USHCFA", "USHCFA"),
            ("USSSA", "USSSA"),
        ),
    ),
    "0364": (
        "Comment type",
        (
            ("1R", "1R"),
            ("2R", "2R"),
            ("AI", "AI"),
            ("DR", "DR"),
            ("GI", "GI"),
            ("GR", "GR"),
            ("PI", "PI"),
            ("RE", "RE"),
        ),
    ),
    "0399": (
        "Country code",
        (
            ("ABW", "ABW"),
            ("AFG", "AFG"),
            ("AFT", "AFT"),
            ("AGO", "AGO"),
            ("AIA", "AIA"),
            ("ALB", "ALB"),
            ("AND", "AND"),
            ("ANT", "ANT"),
            ("ARE", "ARE"),
            ("ARG", "ARG"),
            ("ARM", "ARM"),
            ("ASM", "ASM"),
            ("ATA", "ATA"),
            ("ATG", "ATG"),
            ("AUS", "AUS"),
            ("AUT", "AUT"),
            ("AZE", "AZE"),
            ("BDI", "BDI"),
            ("BEL", "BEL"),
            ("BEN", "BEN"),
            ("BFA", "BFA"),
            ("BGD", "BGD"),
            ("BGR", "BGR"),
            ("BHR", "BHR"),
            ("BHS", "BHS"),
            ("BIH", "BIH"),
            ("BLR", "BLR"),
            ("BLZ", "BLZ"),
            ("BMU", "BMU"),
            ("BOL", "BOL"),
            ("BRA", "BRA"),
            ("BRB", "BRB"),
            ("BRN", "BRN"),
            ("BTN", "BTN"),
            ("BVT", "BVT"),
            ("BWA", "BWA"),
            ("CAF", "CAF"),
            ("CAN", "CAN"),
            ("CCK", "CCK"),
            ("CHE", "CHE"),
            ("CHL", "CHL"),
            ("CHN", "CHN"),
            ("CIV", "CIV"),
            ("CMR", "CMR"),
            ("COD", "COD"),
            ("COG", "COG"),
            ("COK", "COK"),
            ("COL", "COL"),
            ("COM", "COM"),
            ("CPV", "CPV"),
            ("CRI", "CRI"),
            ("CUB", "CUB"),
            ("CXR", "CXR"),
            ("CYM", "CYM"),
            ("CYP", "CYP"),
            ("CZE", "CZE"),
            ("DEU", "DEU"),
            ("DJI", "DJI"),
            ("DMA", "DMA"),
            ("DNK", "DNK"),
            ("DOM", "DOM"),
            ("DZA", "DZA"),
            ("ECU", "ECU"),
            ("EGY", "EGY"),
            ("ERI", "ERI"),
            ("ESH", "ESH"),
            ("ESP", "ESP"),
            ("EST", "EST"),
            ("ETH", "ETH"),
            ("FIN", "FIN"),
            ("FJI", "FJI"),
            ("FLK", "FLK"),
            ("FRA", "FRA"),
            ("FRO", "FRO"),
            ("FSM", "FSM"),
            ("GAB", "GAB"),
            ("GBR", "GBR"),
            ("GEO", "GEO"),
            ("GHA", "GHA"),
            ("GIB", "GIB"),
            ("GIN", "GIN"),
            ("GLP", "GLP"),
            ("GMB", "GMB"),
            ("GNB", "GNB"),
            ("GNQ", "GNQ"),
            ("GRC", "GRC"),
            ("GRD", "GRD"),
            ("GRL", "GRL"),
            ("GTM", "GTM"),
            ("GUF", "GUF"),
            ("GUM", "GUM"),
            ("GUY", "GUY"),
            ("HKG", "HKG"),
            ("HMD", "HMD"),
            ("HND", "HND"),
            ("HRV", "HRV"),
            ("HTI", "HTI"),
            ("HUN", "HUN"),
            ("IDN", "IDN"),
            ("IND", "IND"),
            ("IOT", "IOT"),
            ("IRL", "IRL"),
            ("IRN", "IRN"),
            ("IRQ", "IRQ"),
            ("ISL", "ISL"),
            ("ISR", "ISR"),
            ("ITA", "ITA"),
            ("JAM", "JAM"),
            ("JOR", "JOR"),
            ("JPN", "JPN"),
            ("KAZ", "KAZ"),
            ("KEN", "KEN"),
            ("KGZ", "KGZ"),
            ("KHM", "KHM"),
            ("KIR", "KIR"),
            ("KNA", "KNA"),
            ("KOR", "KOR"),
            ("KWT", "KWT"),
            ("LAO", "LAO"),
            ("LBN", "LBN"),
            ("LBR", "LBR"),
            ("LBY", "LBY"),
            ("LCA", "LCA"),
            ("LIE", "LIE"),
            ("LKA", "LKA"),
            ("LSO", "LSO"),
            ("LTU", "LTU"),
            ("LUX", "LUX"),
            ("LVA", "LVA"),
            ("MAC", "MAC"),
            ("MAR", "MAR"),
            ("MCO", "MCO"),
            ("MDA", "MDA"),
            ("MDG", "MDG"),
            ("MDV", "MDV"),
            ("MEX", "MEX"),
            ("MHL", "MHL"),
            ("MKD", "MKD"),
            ("MLI", "MLI"),
            ("MLT", "MLT"),
            ("MMR", "MMR"),
            ("MNG", "MNG"),
            ("MNP", "MNP"),
            ("MOZ", "MOZ"),
            ("MRT", "MRT"),
            ("MSR", "MSR"),
            ("MTQ", "MTQ"),
            ("MUS", "MUS"),
            ("MWI", "MWI"),
            ("MYS", "MYS"),
            ("MYT", "MYT"),
            ("NAM", "NAM"),
            ("NCL", "NCL"),
            ("NER", "NER"),
            ("NFK", "NFK"),
            ("NGA", "NGA"),
            ("NIC", "NIC"),
            ("NIU", "NIU"),
            ("NLD", "NLD"),
            ("NOR", "NOR"),
            ("NPL", "NPL"),
            ("NRU", "NRU"),
            ("NZL", "NZL"),
            ("OMN", "OMN"),
            ("PAK", "PAK"),
            ("PAN", "PAN"),
            ("PCN", "PCN"),
            ("PER", "PER"),
            ("PHL", "PHL"),
            ("PLW", "PLW"),
            ("PNG", "PNG"),
            ("POL", "POL"),
            ("PRI", "PRI"),
            ("PRK", "PRK"),
            ("PRT", "PRT"),
            ("PRY", "PRY"),
            ("PYF", "PYF"),
            ("QAT", "QAT"),
            ("REU", "REU"),
            ("ROM", "ROM"),
            ("RUS", "RUS"),
            ("RWA", "RWA"),
            ("SAU", "SAU"),
            ("SDN", "SDN"),
            ("SEN", "SEN"),
            ("SGP", "SGP"),
            ("SGS", "SGS"),
            ("SHN", "SHN"),
            ("SJM", "SJM"),
            ("SLB", "SLB"),
            ("SLE", "SLE"),
            ("SLV", "SLV"),
            ("SMR", "SMR"),
            ("SOM", "SOM"),
            ("SPM", "SPM"),
            ("STP", "STP"),
            ("SUR", "SUR"),
            ("SVK", "SVK"),
            ("SVN", "SVN"),
            ("SWE", "SWE"),
            ("SWZ", "SWZ"),
            ("SYC", "SYC"),
            ("SYR", "SYR"),
            ("TCA", "TCA"),
            ("TCD", "TCD"),
            ("TGO", "TGO"),
            ("THA", "THA"),
            ("TJK", "TJK"),
            ("TKL", "TKL"),
            ("TKM", "TKM"),
            ("TMP", "TMP"),
            ("TON", "TON"),
            ("TTO", "TTO"),
            ("TUN", "TUN"),
            ("TUR", "TUR"),
            ("TUV", "TUV"),
            ("TWN", "TWN"),
            ("TZA", "TZA"),
            ("UGA", "UGA"),
            ("UKR", "UKR"),
            ("UMI", "UMI"),
            ("URY", "URY"),
            ("USA", "USA"),
            ("UZB", "UZB"),
            ("VAT", "VAT"),
            ("VCT", "VCT"),
            ("VEN", "VEN"),
            ("VGB", "VGB"),
            ("VIR", "VIR"),
            ("VNM", "VNM"),
            ("VUT", "VUT"),
            ("WLF", "WLF"),
            ("WSM", "WSM"),
            ("YEM", "YEM"),
            ("YUG", "YUG"),
            ("ZAF", "ZAF"),
            ("ZMB", "ZMB"),
            ("ZWE", "ZWE"),
        ),
    ),
    "0443": (
        "Provider role",
        (
            ("AD", "AD"),
            ("AT", "AT"),
            ("CP", "CP"),
            ("FHCP", "FHCP"),
            ("PP", "PP"),
            ("RP", "RP"),
            ("RT", "RT"),
        ),
    ),
    "0465": ("Name/address representation", (("A", "A"), ("I", "I"), ("P", "P"))),
    "0529": (
        "Precision",
        (("D", "D"), ("H", "H"), ("L", "L"), ("M", "M"), ("S", "S"), ("Y", "Y")),
    ),
    "4000": ("Name/address representation", (("A", "A"), ("I", "I"), ("P", "P"))),
}
