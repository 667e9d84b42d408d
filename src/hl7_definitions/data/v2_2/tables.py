# src/hl7_definitions/data/v2_2/tables.py
"""HL7 v2.2 coded value tables."""

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
            ("R01", "ORU/ACK - Unsolicited transmission of an observation message"),
        ),
    ),
    "0004": (
        "Patient class",
        (
            ("E", "Emergency"),
            ("I", "Inpatient"),
            ("O", "Outpatient"),
            ("P", "Preadmit"),
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
    "0053": ("Diagnosis coding method", ()),
    "0055": ("Diagnosis Related Group", ()),
    "0056": ("DRG Grouper Review Code", ()),
    "0059": ("Consent Code", ()),
    "0060": ("Error Code And Location", ()),
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
            ("ADT", "ADT message"),
            ("BAR", "Add/change billing account"),
            ("DFT", "Detail financial transactions"),
            ("ORM", "Order message"),
            ("ORU", "Observational results (unsolicited)"),
            ("QRY", "Query, original mode"),
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
    "0079": ("Assigned Patient Location", ()),
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
    "0089": ("Procedure coding method", ()),
    "0090": ("Procedure type", ()),
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
    "0176": ("Master File Application Identifier", ()),
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
    "0192": ("Type", ()),
    "0193": (
        "Amount class",
        (("AT", "Amount"), ("LM", "Limit"), ("PC", "Percentage"), ("UL", "Unlimited")),
    ),
    "0233": ("Non-Concur Code/Description", ()),
    "0345": ("Appeal Reason", ()),
    "0346": ("Certification Agency", ()),
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
}
