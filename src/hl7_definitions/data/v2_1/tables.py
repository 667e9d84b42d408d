# src/hl7_definitions/data/v2_1/tables.py
"""HL7 v2.1 coded value tables."""

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
            ("AA", "Application Accept"),
            ("AE", "Application Error"),
            ("AR", "Application Reject"),
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
    "0018": ("Patient Type", ()),
    "0021": ("Bad Debt Agency Code", ()),
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
    "0032": ("Charge/Price Indicator", ()),
    "0044": ("Contract Code", ()),
    "0045": ("Courtesy Code", ()),
    "0046": ("Credit Rating", ()),
    "0051": ("Diagnosis Code", ()),
    "0052": ("Diagnosis Type", (("A", "A"), ("F", "F"), ("W", "W"))),
    "0053": ("Diagnosis coding method", ()),
    "0055": ("Diagnosis Related Group", ()),
    "0056": ("DRG Grouper Review Code", ()),
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
            ("ACK", "General acknowledgment"),
            ("ADT", "ADT message"),
            ("ORM", "Order message"),
            ("ORU", "Observational results (unsolicited)"),
            ("QRY", "Query"),
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
    "0087": ("Pre-Admit Test Indicator", ()),
    "0091": ("Query priority", (("D", "Deferred"), ("I", "Immediate"))),
    "0092": ("Re-admission indicator", (("R", "Re-admission"),)),
    "0099": ("VIP Indicator", ()),
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
        (("2.0", "Release 2.0"), ("2.0D", "Demo 2.0"), ("2.1", "Release 2. 1")),
    ),
    "0105": (
        "Source of comment",
        (
            ("L", "Ancillary (filler) department is source of comment"),
            ("O", "Other system is source of comment"),
            ("P", "Orderer (placer) is source of comment"),
        ),
    ),
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
}
