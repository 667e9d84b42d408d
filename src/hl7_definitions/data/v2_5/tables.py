# src/hl7_definitions/data/v2_5/tables.py
"""HL7 v2.5 coded value tables."""

TABLES = {
    "0001": (
        "Administrative Sex",
        (
            ("A", "Ambiguous"),
            ("F", "Female"),
            ("M", "Male"),
            ("N", "Not applicable"),
            ("O", "Other"),
            ("U", "Unknown"),
        ),
    ),
    "0002": (
        "Marital Status",
        (
            ("A", "Separated"),
            ("B", "Unmarried"),
            ("C", "Common law"),
            ("D", "Divorced"),
            ("E", "Legally Separated"),
            ("G", "Living together"),
            ("I", "Interlocutory"),
            ("M", "Married"),
            ("N", "Annulled"),
            ("O", "Other"),
            ("P", "Domestic partner"),
            ("R", "Registered domestic partner"),
            ("S", "Single"),
            ("T", "Unreported"),
            ("U", "Unknown"),
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
            ("A08", "ADT/ACK -  Update patient information"),
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
            ("A52", "ADT/ACK - Cancel leave of absence for a patient"),
            ("A53", "ADT/ACK - Cancel patient returns from a leave of absence"),
            ("A54", "ADT/ACK - Change attending doctor"),
            ("A55", "ADT/ACK - Cancel change attending doctor"),
            ("A60", "ADT/ACK - Update allergy information"),
            ("A61", "ADT/ACK - Change consulting doctor"),
            ("A62", "ADT/ACK - Cancel change consulting doctor"),
            ("B01", "PMU/ACK - Add personnel record"),
            ("B02", "PMU/ACK - Update personnel record"),
            ("B03", "PMU/ACK - Delete personnel record"),
            ("B04", "PMU/ACK - Active practicing person"),
            ("B05", "PMU/ACK - Deactivate practicing person"),
            ("B06", "PMU/ACK - Terminate practicing person"),
            ("B07", "PMU/ACK - Grant certificate/permission"),
            ("B08", "PMU/ACK - Revoke certificate/permission"),
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
            ("J01", "QCN/ACK - Cancel query/acknowledge message"),
            ("J02", "QSX/ACK - Cancel subscription/acknowledge message"),
            ("K11", "RSP - Segment pattern response in response to QBP^Q11"),
            ("K13", "RTB - Tabular response in response to QBP^Q13"),
            ("K15", "RDY - Display response in response to QBP^Q15"),
            ("K21", "RSP - Get person demographics response"),
            ("K22", "RSP - Find candidates response"),
            ("K23", "RSP - Get corresponding identifiers response"),
            ("K24", "RSP - Allocate identifiers response"),
            ("K25", "RSP - Personnel information by segment response"),
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
            ("M12", "MFN/MFK - Master file notification message"),
            ("M13", "MFN/MFK - Master file notification - general"),
            ("M14", "MFN/MFK - Master file notification - site defined"),
            ("M15", "MFN/MFK - Inventory item master file notification"),
            ("N01", "NMQ/NMR - Application management query message"),
            ("N02", "NMD/ACK - Application management data message (unsolicited)"),
            ("O01", "ORM - Order message (also RDE, RDS, RGV, RAS)"),
            ("O02", "ORR - Order response (also RRE, RRD, RRG, RRA)"),
            ("O03", "OMD - Diet order"),
            ("O04", "ORD - Diet order acknowledgment"),
            ("O05", "OMS - Stock requisition order"),
            ("O06", "ORS - Stock requisition acknowledgment"),
            ("O07", "OMN - Non-stock requisition order"),
            ("O08", "ORN - Non-stock requisition acknowledgment"),
            ("O09", "OMP - Pharmacy/treatment order"),
            ("O10", "ORP - Pharmacy/treatment order acknowledgment"),
            ("O11", "RDE - Pharmacy/treatment encoded order"),
            ("O12", "RRE - Pharmacy/treatment encoded order acknowledgment"),
            ("O13", "RDS - Pharmacy/treatment dispense"),
            ("O14", "RRD - Pharmacy/treatment dispense acknowledgment"),
            ("O15", "RGV - Pharmacy/treatment give"),
            ("O16", "RRG - Pharmacy/treatment give acknowledgment"),
            ("O17", "RAS - Pharmacy/treatment administration"),
            ("O18", "RRA - Pharmacy/treatment administration acknowledgment"),
            ("O19", "OMG - General clinical order"),
            ("O20", "ORG/ORL - General clinical order response"),
            ("O21", "OML - Laboratory order"),
            ("O22", "ORL - General laboratory order response message to any OML"),
            ("O23", "OMI - Imaging order"),
            ("O24", "ORI - Imaging order response message to any OMI"),
            ("O25", "RDE - Pharmacy/treatment refill authorization request"),
            ("O26", "RRE - Pharmacy/treatment refill authorization acknowledgment"),
            ("O27", "OMB - Blood product order"),
            ("O28", "ORB - Blood product order acknowledgment"),
            ("O29", "BPS - Blood product dispense status"),
            ("O30", "BRP - Blood product dispense status acknowledgment"),
            ("O31", "BTS - Blood product transfusion/disposition"),
            ("O32", "BRT - Blood product transfusion/disposition acknowledgment"),
            (
                "O33",
                "OML - Laboratory order for multiple orders related to a single specimen",
            ),
            (
                "O34",
                "ORL - Laboratory order response message to a multiple order related to single specimen OML",
            ),
            (
                "O35",
                "OML - Laboratory order for multiple orders related to a single container of a specimen",
            ),
            (
                "O36",
                "ORL - Laboratory order response message to a single container of a specimen OML",
            ),
            ("P01", "BAR/ACK - Add patient accounts"),
            ("P02", "BAR/ACK - Purge patient accounts"),
            ("P03", "DFT/ACK - Post detail financial transaction"),
            ("P04", "QRY/DSP - Generate bill and A/R statements"),
            ("P05", "BAR/ACK - Update account"),
            ("P06", "BAR/ACK - End account"),
            ("P07", "PEX - Unsolicited initial individual product experience report"),
            ("P08", "PEX - Unsolicited update individual product experience report"),
            ("P09", "SUR - Summary product experience report"),
            ("P10", "BAR/ACK - Transmit ambulatory payment classification (APC)"),
            ("P11", "DFT/ACK - Post detail financial transactions - new"),
            ("P12", "BAR/ACK - Update diagnosis/procedure"),
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
            (
                "Q11",
                "QBP - Query by parameter requesting an RSP segment pattern response",
            ),
            ("Q13", "QBP - Query by parameter requesting an RTB tabular response"),
            ("Q15", "QBP - Query by parameter requesting an RDY display response"),
            ("Q16", "QSB - Create subscription"),
            ("Q17", "QVR - Query for previous events"),
            ("Q21", "QBP - Get person demographics"),
            ("Q22", "QBP - Find candidates"),
            ("Q23", "QBP - Get corresponding identifiers"),
            ("Q24", "QBP - Allocate identifiers"),
            ("Q25", "QBP - Personnel information by segment query"),
            ("Q26", "ROR - Pharmacy/treatment order response"),
            ("Q27", "RAR - Pharmacy/treatment administration information"),
            ("Q28", "RDR - Pharmacy/treatment dispense information"),
            ("Q29", "RER - Pharmacy/treatment encoded order information"),
            ("Q30", "RGR - Pharmacy/treatment dose information"),
            ("R01", "ORU/ACK - Unsolicited transmission of an observation message"),
            ("R02", "QRY - Query for results of observation"),
            (
                "R03",
                "QRY/DSR - Display-oriented results, query/unsol. update (for backward compatibility only)",
            ),
            ("R04", "ORF - Response to query; transmission of requested observation"),
            ("R07", "EDR - Enhanced display response"),
            ("R08", "TBR - Tabular data response"),
            ("R09", "ERP - Event replay response"),
            ("R21", "OUL - Unsolicited laboratory observation"),
            ("R22", "OUL - Unsolicited specimen oriented observation message"),
            (
                "R23",
                "OUL - Unsolicited specimen container oriented observation message",
            ),
            ("R24", "OUL - Unsolicited order oriented observation message"),
            (
                "R30",
                "ORU - Unsolicited point-of-care observation message without existing order - place an order",
            ),
            (
                "R31",
                "ORU - Unsolicited new point-of-care observation message - search for an order",
            ),
            ("R32", "ORU - Unsolicited pre-ordered point-of-care observation"),
            ("ROR", "ROR - Pharmacy prescription order query response"),
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
            ("U01", "ESU/ACK - Automated equipment status update"),
            ("U02", "ESR/ACK - Automated equipment status request"),
            ("U03", "SSU/ACK - Specimen status update"),
            ("U04", "SSR/ACK - Specimen status request"),
            ("U05", "INU/ACK - Automated equipment inventory update"),
            ("U06", "INR/ACK - Automated equipment inventory request"),
            ("U07", "EAC/ACK - Automated equipment command"),
            ("U08", "EAR/ACK - Automated equipment response"),
            ("U09", "EAN/ACK - Automated equipment notification"),
            ("U10", "TCU/ACK - Automated equipment test code settings update"),
            ("U11", "TCR/ACK - Automated equipment test code settings request"),
            ("U12", "LSU/ACK - Automated equipment log/service update"),
            ("U13", "LSR/ACK - Automated equipment log/service request"),
            ("V01", "VXQ - Query for vaccination record"),
            (
                "V02",
                "VXX - Response to vaccination query returning multiple PID matches",
            ),
            ("V03", "VXR - Vaccination record response"),
            ("V04", "VXU - Unsolicited vaccination record update"),
            (
                "Varies",
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
        "Patient Class",
        (
            ("B", "Obstetrics"),
            ("C", "Commercial Account"),
            ("E", "Emergency"),
            ("I", "Inpatient"),
            ("N", "Not Applicable"),
            ("O", "Outpatient"),
            ("P", "Preadmit"),
            ("R", "Recurring patient"),
            ("U", "Unknown"),
        ),
    ),
    "0005": (
        "Race",
        (
            ("...", "..."),
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
        "Admission Type",
        (
            ("A", "Accident"),
            ("C", "Elective"),
            ("E", "Emergency"),
            ("L", "Labor and Delivery"),
            ("N", "Newborn (Birth in healthcare facility)"),
            ("R", "Routine"),
            ("U", "Urgent"),
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
        "Ambulatory Status",
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
        (
            ("AJ", "Adjustment"),
            ("CD", "Credit"),
            ("CG", "Charge"),
            ("CO", "Co-payment"),
            ("PY", "Payment"),
        ),
    ),
    "0018": ("Patient Type", ()),
    "0019": ("Anesthesia Code", ()),
    "0021": ("Bad Debt Agency Code", ()),
    "0022": ("Billing Status", ()),
    "0023": (
        "Admit Source",
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
            ("12 ... 16", "12 ... 16"),
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
            ("GID", "GID"),
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
            ("SOF", "SOF"),
            ("SOP", "SOP"),
            ("SSA", "SSA"),
            ("SSR", "SSR"),
            ("STA", "STA"),
            ("VXI", "VXI"),
            ("XID", "XID"),
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
            ("O", "Other"),
            ("U", "Unknown"),
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
        "Specimen Action Code",
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
        "Employment Status",
        (
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("6", "6"),
            ("9", "9"),
            ("C", "C"),
            ("L", "L"),
            ("O", "O"),
            ("T", "T"),
        ),
    ),
    "0068": ("Guarantor Type", ()),
    "0069": (
        "Hospital Service",
        (
            ("CAR", "Cardiac Service"),
            ("MED", "Medical Service"),
            ("PUL", "Pulmonary Service"),
            ("SUR", "Surgical Service"),
            ("URO", "Urology Service"),
        ),
    ),
    "0070": (
        "Specimen Source Codes",
        (
            ("ABS", "ABS"),
            ("ACNE", "ACNE"),
            ("ACNFLD", "ACNFLD"),
            ("AIRS", "AIRS"),
            ("ALL", "ALL"),
            ("AMN", "AMN"),
            ("AMP", "AMP"),
            ("ANGI", "ANGI"),
            ("ARTC", "ARTC"),
            ("ASERU", "ASERU"),
            ("ASP", "ASP"),
            ("ATTE", "ATTE"),
            ("AUTOC", "AUTOC"),
            ("AUTP", "AUTP"),
            ("BBL", "BBL"),
            ("BCYST", "BCYST"),
            ("BDY", "BDY"),
            ("BIFL", "BIFL"),
            ("BITE", "BITE"),
            ("BLD", "BLD"),
            ("BLDA", "BLDA"),
            ("BLDC", "BLDC"),
            ("BLDCO", "BLDCO"),
            ("BLDV", "BLDV"),
            ("BLEB", "BLEB"),
            ("BLIST", "BLIST"),
            ("BOIL", "BOIL"),
            ("BON", "BON"),
            ("BOWL", "BOWL"),
            ("BPH", "BPH"),
            ("BPU", "BPU"),
            ("BRN", "BRN"),
            ("BRO", "BRO"),
            ("BRSH", "BRSH"),
            ("BRTH", "BRTH"),
            ("BRUS", "BRUS"),
            ("BUB", "BUB"),
            ("BULLA", "BULLA"),
            ("BX", "BX"),
            ("CALC", "CALC"),
            ("CARBU", "CARBU"),
            ("CAT", "CAT"),
            ("CBITE", "CBITE"),
            ("CDM", "CDM"),
            ("CLIPP", "CLIPP"),
            ("CNJT", "CNJT"),
            ("CNL", "CNL"),
            ("COL", "COL"),
            ("CONE", "CONE"),
            ("CSCR", "CSCR"),
            ("CSERU", "CSERU"),
            ("CSF", "CSF"),
            ("CSITE", "CSITE"),
            ("CSMY", "CSMY"),
            ("CST", "CST"),
            ("CSVR", "CSVR"),
            ("CTP", "CTP"),
            ("CUR", "CUR"),
            ("CVM", "CVM"),
            ("CVPS", "CVPS"),
            ("CVPT", "CVPT"),
            ("CVX", "CVX"),
            ("CYN", "CYN"),
            ("CYST", "CYST"),
            ("DBITE", "DBITE"),
            ("DCS", "DCS"),
            ("DEC", "DEC"),
            ("DEION", "DEION"),
            ("DIA", "DIA"),
            ("DIAF", "DIAF"),
            ("DISCHG", "DISCHG"),
            ("DIV", "DIV"),
            ("DOSE", "DOSE"),
            ("DRN", "DRN"),
            ("DRNG", "DRNG"),
            ("DRNGP", "DRNGP"),
            ("DUFL", "DUFL"),
            ("EAR", "EAR"),
            ("EARW", "EARW"),
            ("EBRUSH", "EBRUSH"),
            ("EEYE", "EEYE"),
            ("EFF", "EFF"),
            ("EFFUS", "EFFUS"),
            ("EFOD", "EFOD"),
            ("EISO", "EISO"),
            ("ELT", "ELT"),
            ("ENDC", "ENDC"),
            ("ENDM", "ENDM"),
            ("ENVIR", "ENVIR"),
            ("EOS", "EOS"),
            ("EOTH", "EOTH"),
            ("ESOI", "ESOI"),
            ("ESOS", "ESOS"),
            ("ETA", "ETA"),
            ("ETTP", "ETTP"),
            ("ETTUB", "ETTUB"),
            ("EWHI", "EWHI"),
            ("EXG", "EXG"),
            ("EXS", "EXS"),
            ("EXUDTE", "EXUDTE"),
            ("EYE", "EYE"),
            ("FAW", "FAW"),
            ("FBLOOD", "FBLOOD"),
            ("FGA", "FGA"),
            ("FIB", "FIB"),
            ("FIST", "FIST"),
            ("FLD", "FLD"),
            ("FLT", "FLT"),
            ("FLU", "FLU"),
            ("FLUID", "FLUID"),
            ("FOLEY", "FOLEY"),
            ("FRS", "FRS"),
            ("FSCLP", "FSCLP"),
            ("FUR", "FUR"),
            ("GAS", "GAS"),
            ("GASA", "GASA"),
            ("GASAN", "GASAN"),
            ("GASBR", "GASBR"),
            ("GASD", "GASD"),
            ("GAST", "GAST"),
            ("GEN", "GEN"),
            ("GENC", "GENC"),
            ("GENL", "GENL"),
            ("GENV", "GENV"),
            ("GRAFT", "GRAFT"),
            ("GRANU", "GRANU"),
            ("GROSH", "GROSH"),
            ("GSOL", "GSOL"),
            ("GSPEC", "GSPEC"),
            ("GT", "GT"),
            ("GTUBE", "GTUBE"),
            ("HAR", "HAR"),
            ("HBITE", "HBITE"),
            ("HBLUD", "HBLUD"),
            ("HEMAQ", "HEMAQ"),
            ("HEMO", "HEMO"),
            ("HERNI", "HERNI"),
            ("HEV", "HEV"),
            ("HIC", "HIC"),
            ("HYDC", "HYDC"),
            ("IBITE", "IBITE"),
            ("ICYST", "ICYST"),
            ("IDC", "IDC"),
            ("IHG", "IHG"),
            ("ILEO", "ILEO"),
            ("ILLEG", "ILLEG"),
            ("IMP", "IMP"),
            ("INCI", "INCI"),
            ("INFIL", "INFIL"),
            ("INS", "INS"),
            ("INTRD", "INTRD"),
            ("ISLT", "ISLT"),
            ("IT", "IT"),
            ("IUD", "IUD"),
            ("IVCAT", "IVCAT"),
            ("IVFLD", "IVFLD"),
            ("IVTIP", "IVTIP"),
            ("JEJU", "JEJU"),
            ("JNTFLD", "JNTFLD"),
            ("JP", "JP"),
            ("KELOI", "KELOI"),
            ("KIDFLD", "KIDFLD"),
            ("LAM", "LAM"),
            ("LAVG", "LAVG"),
            ("LAVGG", "LAVGG"),
            ("LAVGP", "LAVGP"),
            ("LAVPG", "LAVPG"),
            ("LENS1", "LENS1"),
            ("LENS2", "LENS2"),
            ("LESN", "LESN"),
            ("LIQ", "LIQ"),
            ("LIQO", "LIQO"),
            ("LN", "LN"),
            ("LNA", "LNA"),
            ("LNV", "LNV"),
            ("LSAC", "LSAC"),
            ("LYM", "LYM"),
            ("MAC", "MAC"),
            ("MAHUR", "MAHUR"),
            ("MAR", "MAR"),
            ("MASS", "MASS"),
            ("MBLD", "MBLD"),
            ("MEC", "MEC"),
            ("MILK", "MILK"),
            ("MLK", "MLK"),
            ("MUCOS", "MUCOS"),
            ("MUCUS", "MUCUS"),
            ("NAIL", "NAIL"),
            ("NASDR", "NASDR"),
            ("NEDL", "NEDL"),
            ("NEPH", "NEPH"),
            ("NGASP", "NGASP"),
            ("NGAST", "NGAST"),
            ("NGS", "NGS"),
            ("NODUL", "NODUL"),
            ("NOS", "NOS"),
            ("NSECR", "NSECR"),
            ("ORH", "ORH"),
            ("ORL", "ORL"),
            ("OTH", "OTH"),
            ("PACEM", "PACEM"),
            ("PAFL", "PAFL"),
            ("PAT", "PAT"),
            ("PCFL", "PCFL"),
            ("PDSIT", "PDSIT"),
            ("PDTS", "PDTS"),
            ("PELVA", "PELVA"),
            ("PENIL", "PENIL"),
            ("PERIA", "PERIA"),
            ("PILOC", "PILOC"),
            ("PINS", "PINS"),
            ("PIS", "PIS"),
            ("PLAN", "PLAN"),
            ("PLAS", "PLAS"),
            ("PLB", "PLB"),
            ("PLC", "PLC"),
            ("PLEVS", "PLEVS"),
            ("PLR", "PLR"),
            ("PMN", "PMN"),
            ("PND", "PND"),
            ("POL", "POL"),
            ("POPGS", "POPGS"),
            ("POPLG", "POPLG"),
            ("POPLV", "POPLV"),
            ("PORTA", "PORTA"),
            ("PPP", "PPP"),
            ("PROST", "PROST"),
            ("PRP", "PRP"),
            ("PRT", "PRT"),
            ("PSC", "PSC"),
            ("PUNCT", "PUNCT"),
            ("PUS", "PUS"),
            ("PUSFR", "PUSFR"),
            ("PUST", "PUST"),
            ("QC3", "QC3"),
            ("RANDU", "RANDU"),
            ("RBC", "RBC"),
            ("RBITE", "RBITE"),
            ("RECT", "RECT"),
            ("RECTA", "RECTA"),
            ("RENALC", "RENALC"),
            ("RENC", "RENC"),
            ("RES", "RES"),
            ("RT", "RT"),
            ("SAL", "SAL"),
            ("SCAR", "SCAR"),
            ("SCLV", "SCLV"),
            ("SCROA", "SCROA"),
            ("SECRE", "SECRE"),
            ("SER", "SER"),
            ("SHU", "SHU"),
            ("SHUNF", "SHUNF"),
            ("SHUNT", "SHUNT"),
            ("SITE", "SITE"),
            ("SKBP", "SKBP"),
            ("SKM", "SKM"),
            ("SKN", "SKN"),
            ("SMM", "SMM"),
            ("SMN", "SMN"),
            ("SNV", "SNV"),
            ("SPRM", "SPRM"),
            ("SPRP", "SPRP"),
            ("SPRPB", "SPRPB"),
            ("SPS", "SPS"),
            ("SPT", "SPT"),
            ("SPTC", "SPTC"),
            ("SPTT", "SPTT"),
            ("SPUT1", "SPUT1"),
            ("SPUTIN", "SPUTIN"),
            ("SPUTSP", "SPUTSP"),
            ("STER", "STER"),
            ("STL", "STL"),
            ("STON", "STON"),
            ("STONE", "STONE"),
            ("SUBMA", "SUBMA"),
            ("SUBMX", "SUBMX"),
            ("SUMP", "SUMP"),
            ("SUP", "SUP"),
            ("SUTUR", "SUTUR"),
            ("SWGZ", "SWGZ"),
            ("SWT", "SWT"),
            ("TASP", "TASP"),
            ("TEAR", "TEAR"),
            ("THRB", "THRB"),
            ("THRT", "THRT"),
            ("TISG", "TISG"),
            ("TISPL", "TISPL"),
            ("TISS", "TISS"),
            ("TISU", "TISU"),
            ("TLC", "TLC"),
            ("TLGI", "TLGI"),
            ("TLNG", "TLNG"),
            ("TRAC", "TRAC"),
            ("TRANS", "TRANS"),
            ("TSERU", "TSERU"),
            ("TSMI", "TSMI"),
            ("TSTES", "TSTES"),
            ("TTRA", "TTRA"),
            ("TUB", "TUB"),
            ("TUBES", "TUBES"),
            ("TUMOR", "TUMOR"),
            ("TZANC", "TZANC"),
            ("UDENT", "UDENT"),
            ("ULC", "ULC"),
            ("UMB", "UMB"),
            ("UMED", "UMED"),
            ("UR", "UR"),
            ("URC", "URC"),
            ("URINB", "URINB"),
            ("URINC", "URINC"),
            ("URINM", "URINM"),
            ("URINN", "URINN"),
            ("URINP", "URINP"),
            ("URNS", "URNS"),
            ("URT", "URT"),
            ("URTH", "URTH"),
            ("USCOP", "USCOP"),
            ("USPEC", "USPEC"),
            ("USUB", "USUB"),
            ("VASTIP", "VASTIP"),
            ("VENT", "VENT"),
            ("VITF", "VITF"),
            ("VOM", "VOM"),
            ("WASH", "WASH"),
            ("WASI", "WASI"),
            ("WAT", "WAT"),
            ("WB", "WB"),
            ("WBC", "WBC"),
            ("WEN", "WEN"),
            ("WICK", "WICK"),
            ("WND", "WND"),
            ("WNDA", "WNDA"),
            ("WNDD", "WNDD"),
            ("WNDE", "WNDE"),
            ("WORM", "WORM"),
            ("WRT", "WRT"),
            ("WWA", "WWA"),
            ("WWO", "WWO"),
            ("WWT", "WWT"),
            ("XXX", "XXX"),
        ),
    ),
    "0072": ("Insurance plan ID", ()),
    "0073": ("Interest Rate Code", ()),
    "0074": (
        "Diagnostic Service Section ID",
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
            ("BAR", "Add/change billing account"),
            ("BPS", "Blood product dispense status message"),
            ("BRP", "Blood product dispense status acknowledgment message"),
            ("BRT", "Blood product transfusion/disposition acknowledgment message"),
            ("BTS", "Blood product transfusion/disposition message"),
            ("CRM", "Clinical study registration message"),
            ("CSU", "Unsolicited study data message"),
            ("DFT", "Detail financial transactions"),
            ("DOC", "Document response"),
            ("DSR", "Display response"),
            ("EAC", "Automated equipment command message"),
            ("EAN", "Automated equipment notification message"),
            ("EAR", "Automated equipment response message"),
            ("EDR", "Enhanced display response"),
            ("EQQ", "Embedded query language query"),
            ("ERP", "Event replay response"),
            ("ESR", "Automated equipment status update acknowledgment message"),
            ("ESU", "Automated equipment status update message"),
            ("INR", "Automated equipment inventory request message"),
            ("INU", "Automated equipment inventory update message"),
            ("LSR", "Automated equipment log/service request message"),
            ("LSU", "Automated equipment log/service update message"),
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
            ("OMB", "Blood product order message"),
            ("OMD", "Dietary order"),
            ("OMG", "General clinical order message"),
            ("OMI", "Imaging order"),
            ("OML", "Laboratory order message"),
            ("OMN", "Non-stock requisition order message"),
            ("OMP", "Pharmacy/treatment order message"),
            ("OMS", "Stock requisition order message"),
            ("ORB", "Blood product order acknowledgment message"),
            ("ORD", "Dietary order - General order acknowledgment message"),
            ("ORF", "Query for results of observation"),
            ("ORG", "General clinical order acknowledgment message"),
            ("ORI", "Imaging order acknowledgment message"),
            ("ORL", "General laboratory order response message to any OML"),
            ("ORM", "Pharmacy/treatment order message"),
            ("ORN", "Non-stock requisition - General order acknowledgment message"),
            ("ORP", "Pharmacy/treatment order acknowledgment message"),
            ("ORR", "General order response message response to any ORM"),
            ("ORS", "Stock requisition - General order acknowledgment message"),
            ("ORU", "Unsolicited transmission of an observation message"),
            ("OSQ", "Query response for order status"),
            ("OSR", "Query response for order status"),
            ("OUL", "Unsolicited laboratory observation message"),
            ("PEX", "Product experience message"),
            ("PGL", "Patient goal message"),
            ("PIN", "Patient insurance information"),
            ("PMU", "Add personnel record"),
            ("PPG", "Patient pathway message (goal-oriented)"),
            ("PPP", "Patient pathway message (problem-oriented)"),
            ("PPR", "Patient problem message"),
            ("PPT", "Patient pathway goal-oriented response"),
            ("PPV", "Patient goal response"),
            ("PRR", "Patient problem response"),
            ("PTR", "Patient pathway problem-oriented response"),
            ("QBP", "Query by parameter"),
            ("QCK", "Deferred query"),
            ("QCN", "Cancel query"),
            ("QRY", "Query, original mode"),
            ("QSB", "Create subscription"),
            ("QSX", "Cancel subscription/acknowledge message"),
            ("QVR", "Query for previous events"),
            ("RAR", "Pharmacy/treatment administration information"),
            ("RAS", "Pharmacy/treatment administration message"),
            ("RCI", "Return clinical information"),
            ("RCL", "Return clinical list"),
            ("RDE", "Pharmacy/treatment encoded order message"),
            ("RDR", "Pharmacy/treatment dispense information"),
            ("RDS", "Pharmacy/treatment dispense message"),
            ("RDY", "Display based response"),
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
            ("RSP", "Segment pattern response"),
            ("RTB", "Tabular response"),
            ("SIU", "Schedule information unsolicited"),
            ("SPQ", "Stored procedure request"),
            ("SQM", "Schedule query message"),
            ("SQR", "Schedule query response"),
            ("SRM", "Schedule request message"),
            ("SRR", "Scheduled request response"),
            ("SSR", "Specimen status request message"),
            ("SSU", "Specimen status update message"),
            ("SUR", "Summary product experience report"),
            ("TBR", "Tabular response"),
            ("TCR", "Automated equipment test code settings request message"),
            ("TCU", "Automated equipment test code settings update message"),
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
        "Nature of Abnormal Testing",
        (
            ("A", "An age-based population"),
            ("B", "B"),
            ("N", "None - generic normal range"),
            ("R", "A race-based population"),
            ("S", "A sex-based population"),
            ("SP", "SP"),
            ("ST", "ST"),
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
    "0092": ("Re-Admission Indicator", (("R", "Re-admission"),)),
    "0093": ("Release Information", (("_", "_"), ("N", "N"), ("Y", "Y"))),
    "0098": (
        "Type of Agreement",
        (("M", "Maternity"), ("S", "Standard"), ("U", "Unified")),
    ),
    "0099": ("VIP Indicator", ()),
    "0100": (
        "Invocation event",
        (
            ("D", "On discontinue"),
            ("O", "On order"),
            ("R", "At time service is completed"),
            ("S", "At time service is started"),
            ("T", "At a designated date/time"),
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
            ("2.4", "Release 2.4"),
            ("2.5", "Release 2.5"),
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
        "Discharge Disposition",
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
            ("10 _19", "10 _19"),
            ("20", "20"),
            ("21 ... 29", "21 ... 29"),
            ("30", "30"),
            ("31 _ 39", "31 _ 39"),
            ("40", "40"),
            ("41", "41"),
            ("42", "42"),
        ),
    ),
    "0113": ("Discharged to Location", ()),
    "0114": ("Diet Type", ()),
    "0115": ("Servicing Facility", ()),
    "0116": (
        "Bed Status",
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
        "Order control codes",
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
            ("OP", "Notification of order for outside dispense"),
            ("OR", "Released as requested"),
            ("PA", "Parent order/service"),
            ("PR", "Previous results with new order/service"),
            ("PY", "Notification of replacement order for outside dispense"),
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
        "Result Status",
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
        "Transportation Mode",
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
    "0127": (
        "Allergen Type",
        (
            ("AA", "AA"),
            ("DA", "DA"),
            ("EA", "EA"),
            ("FA", "FA"),
            ("LA", "LA"),
            ("MA", "MA"),
            ("MC", "MC"),
            ("PA", "PA"),
        ),
    ),
    "0128": (
        "Allergy Severity",
        (("MI", "MI"), ("MO", "MO"), ("SV", "SV"), ("U", "U")),
    ),
    "0129": ("Accommodation Code", ()),
    "0130": (
        "Visit User Code",
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
        "Procedure Practitioner Identifier Code Type",
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
    "0135": ("Assignment of Benefits", (("M", "M"), ("N", "N"), ("Y", "Y"))),
    "0136": ("Yes/no indicator", (("N", "No"), ("Y", "Yes"))),
    "0137": (
        "Mail Claim Party",
        (("E", "E"), ("G", "G"), ("I", "I"), ("O", "O"), ("P", "P")),
    ),
    "0139": ("Employer Information Data", ()),
    "0140": (
        "Military Service",
        (
            ("AUSA", "AUSA"),
            ("AUSAF", "AUSAF"),
            ("AUSN", "AUSN"),
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
        "Military Rank/Grade",
        (
            ("E1... E9", "E1... E9"),
            ("O1 ... O9", "O1 ... O9"),
            ("W1 ... W4", "W1 ... W4"),
        ),
    ),
    "0142": ("Military Status", (("ACT", "ACT"), ("DEC", "DEC"), ("RET", "RET"))),
    "0143": ("Non-covered Insurance Code", ()),
    "0144": (
        "Eligibility Source",
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
    "0148": ("Money or percentage indicator", (("AT", "AT"), ("PC", "PC"))),
    "0149": ("Day type", (("AP", "AP"), ("DE", "DE"), ("PE", "PE"))),
    "0150": (
        "Certification patient type",
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
    "0159": ("Diet Code Specification Type", (("D", "D"), ("P", "P"), ("S", "S"))),
    "0160": (
        "Tray Type",
        (
            ("EARLY", "EARLY"),
            ("GUEST", "GUEST"),
            ("LATE", "LATE"),
            ("MSG", "MSG"),
            ("NO", "NO"),
        ),
    ),
    "0161": ("Allow Substitution", (("G", "G"), ("N", "N"), ("T", "T"))),
    "0162": (
        "Route of Administration",
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
        "Body site",
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
        "Administration Device",
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
        "Administration Method",
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
    "0166": ("RX Component Type", (("A", "A"), ("B", "B"))),
    "0167": (
        "Substitution Status",
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
    "0173": ("Coordination of Benefits", (("CO", "CO"), ("IN", "IN"))),
    "0174": (
        "Nature of Service/Test/Observation",
        (("A", "A"), ("C", "C"), ("F", "F"), ("P", "P"), ("S", "S")),
    ),
    "0175": (
        "Master file identifier code",
        (
            ("CDM", "CDM"),
            ("CLN", "CLN"),
            ("CMA", "CMA"),
            ("CMB", "CMB"),
            ("INV", "INV"),
            ("LOC", "LOC"),
            ("OMA", "OMA"),
            ("OMB", "OMB"),
            ("OMC", "OMC"),
            ("OMD", "OMD"),
            ("OME", "OME"),
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
    "0183": ("Active/Inactive", (("A", "A"), ("I", "I"))),
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
        "Ethnic Group",
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
            ("AU", "Audio data"),
            ("FT", "Formatted text"),
            ("IM", "Image data"),
            ("multipart", "MIME multipart package"),
            ("NS", "Non-scanned image"),
            ("SD", "Scanned document"),
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
            ("I", "Licensing Name"),
            ("L", "Legal Name"),
            ("M", "Maiden Name"),
            ("N", "Nickname /\"Call me\" Name/Street Name"),
            ("P", "Name of Partner/Spouse"),
            ("R", "Registered Name (animals only)"),
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
            ("TDD", "Telecommunications Device for the Deaf"),
            ("TTY", "Teletypewriter"),
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
            ("ANC", "ANC"),
            ("AND", "AND"),
            ("ANON", "ANON"),
            ("ANT", "ANT"),
            ("APRN", "APRN"),
            ("BA", "BA"),
            ("BC", "BC"),
            ("BR", "Birth registry number"),
            ("BRN", "BRN"),
            ("CC", "CC"),
            ("CY", "CY"),
            ("DDS", "DDS"),
            ("DEA", "DEA"),
            ("DFN", "DFN"),
            ("DI", "DI"),
            ("DL", "Driver's license number"),
            ("DN", "Doctor number"),
            ("DO", "DO"),
            ("DPM", "DPM"),
            ("DR", "DR"),
            ("DS", "DS"),
            ("EI", "Employee number"),
            ("EN", "Employer number"),
            ("FI", "Facility ID"),
            ("GI", "Guarantor internal identifier"),
            ("GL", "GL"),
            ("GN", "Guarantor external identifier"),
            ("HC", "Health Card Number"),
            ("IND", "IND"),
            ("JHN", "Jurisdictional health number (Canada)"),
            ("LI", "LI"),
            ("LN", "License number"),
            ("LR", "LR"),
            ("MA", "Patient Medicaid number"),
            ("MB", "MB"),
            ("MC", "Patient's Medicare number"),
            ("MCD", "MCD"),
            ("MCN", "MCN"),
            ("MCR", "MCR"),
            ("MD", "MD"),
            ("MI", "MI"),
            ("MR", "Medical record number"),
            ("MRT", "MRT"),
            ("MS", "MS"),
            ("NE", "NE"),
            ("NH", "NH"),
            ("NI", "National unique individual identifier"),
            ("NII", "NII"),
            ("NIIP", "NIIP"),
            ("NNxxx", "NNxxx"),
            ("NP", "NP"),
            ("NPI", "National provider identifier"),
            ("OD", "OD"),
            ("PA", "PA"),
            ("PCN", "PCN"),
            ("PE", "PE"),
            ("PEN", "PEN"),
            ("PI", "Patient internal identifier"),
            ("PN", "Person number"),
            ("PNT", "PNT"),
            ("PPN", "Passport number"),
            ("PRC", "PRC"),
            ("PRN", "Provider number"),
            ("PT", "Patient external identifier"),
            ("QA", "QA"),
            ("RI", "RI"),
            ("RN", "RN"),
            ("RPH", "RPH"),
            ("RR", "RR"),
            ("RRI", "Regional registry ID"),
            ("SL", "SL"),
            ("SN", "SN"),
            ("SR", "SR"),
            ("SS", "Social Security number"),
            ("TAX", "TAX"),
            ("TN", "TN"),
            ("U", "Unspecified identifier"),
            (
                "UPIN",
                "Medicare/CMS (formerly HCFA)'s Universal Physician Identification numbers",
            ),
            ("VN", "Visit number"),
            ("VS", "VS"),
            ("WC", "WC"),
            ("WCN", "WCN"),
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
            ("Not present", "Not present (the default, meaning current processing)"),
            ("R", "Restore from archive"),
            (
                "T",
                "Current processing, transmitted at intervals (scheduled or on demand)",
            ),
        ),
    ),
    "0208": (
        "Query Response Status",
        (
            ("AE", "Application error"),
            ("AR", "Application reject"),
            ("NF", "No data found, no errors"),
            ("OK", "Data found, no errors (this is the default)"),
        ),
    ),
    "0209": (
        "Relational operator",
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
    "0210": ("Relational conjunction", (("AND", "Default"), ("OR", "Or"))),
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
            ("BIG-5", "BIG-5"),
            ("CNS 11643-1992", "CNS 11643-1992"),
            ("GB 18030-2000", "GB 18030-2000"),
            ("ISO IR14", "ISO IR14"),
            ("ISO IR159", "ISO IR159"),
            ("ISO IR87", "ISO IR87"),
            ("KS X 1001", "KS X 1001"),
            ("UNICODE", "The world wide character standard from ISO/IEC 10646-1-1993"),
            ("UNICODE UTF-16", "UCS Transformation Format, 16-bit form"),
            ("UNICODE UTF-32", "UCS Transformation Format, 32-bit form"),
            ("UNICODE UTF-8", "UCS Transformation Format, 8-bit form"),
            ("8859/15", "The printable characters from the ISO 8859/15 (Latin-15)"),
        ),
    ),
    "0212": ("Nationality", ()),
    "0213": ("Purge Status Code", (("D", "D"), ("I", "I"), ("P", "P"))),
    "0214": (
        "Special Program Code",
        (("CH", "CH"), ("ES", "ES"), ("FP", "FP"), ("O", "O"), ("U", "U")),
    ),
    "0215": ("Publicity Code", (("F", "F"), ("N", "N"), ("O", "O"), ("U", "U"))),
    "0216": ("Patient Status Code", (("AI", "AI"), ("DI", "DI"))),
    "0217": ("Visit Priority Code", (("1", "1"), ("2", "2"), ("3", "3"))),
    "0218": ("Patient Charge Adjustment", ()),
    "0219": ("Recurring Service Code", ()),
    "0220": (
        "Living Arrangement",
        (("A", "A"), ("F", "F"), ("I", "I"), ("R", "R"), ("S", "S"), ("U", "U")),
    ),
    "0222": ("Contact Reason", ()),
    "0223": (
        "Living Dependency",
        (("C", "C"), ("M", "M"), ("O", "O"), ("S", "S"), ("U", "U")),
    ),
    "0224": ("Transport Arranged", (("A", "A"), ("N", "N"), ("U", "U"))),
    "0225": ("Escort Required", (("N", "N"), ("R", "R"), ("U", "U"))),
    "0227": (
        "Manufacturers of Vaccines (code=MVX)",
        (
            ("AB", "AB"),
            ("AD", "AD"),
            ("ALP", "ALP"),
            ("AR", "AR"),
            ("AVB", "AVB"),
            ("AVI", "AVI"),
            ("BA", "BA"),
            ("BAH", "BAH"),
            ("BAY", "BAY"),
            ("BP", "BP"),
            ("BPC", "BPC"),
            ("CEN", "CEN"),
            ("CHI", "CHI"),
            ("CMP", "CMP"),
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
            ("MBL", "MBL"),
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
            ("PWJ", "PWJ"),
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
        "Diagnosis Classification",
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
    "0229": ("DRG Payor", (("C", "C"), ("G", "G"), ("M", "M"))),
    "0230": (
        "Procedure Functional Type",
        (("A", "A"), ("D", "D"), ("I", "I"), ("P", "P")),
    ),
    "0231": ("Student Status", (("F", "F"), ("N", "N"), ("P", "P"))),
    "0232": (
        "Insurance Company Contact Reason",
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
    "0236": ("Event Reported To", (("D", "D"), ("L", "L"), ("M", "M"), ("R", "R"))),
    "0237": (
        "Event Qualification",
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
    "0238": ("Event Seriousness", (("N", "N"), ("S", "S"), ("Y", "Y"))),
    "0239": ("Event Expected", (("N", "N"), ("U", "U"), ("Y", "Y"))),
    "0240": (
        "Event Consequence",
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
        "Patient Outcome",
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
        "Primary Observer's Qualification",
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
    "0243": ("IdentityMay Be Divulged", (("N", "N"), ("NA", "NA"), ("Y", "Y"))),
    "0244": ("Single Use Device", ()),
    "0245": ("Product Problem", ()),
    "0246": ("Product Available for Inspection", ()),
    "0247": (
        "Status of Evaluation",
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
        "Action Taken in Response to the Event",
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
        "Causality Observations",
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
            (" * ", " * "),
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
        "Location Equipment",
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
        "Privacy Level",
        (("F", "F"), ("J", "J"), ("P", "P"), ("Q", "Q"), ("S", "S"), ("W", "W")),
    ),
    "0263": (
        "Level of Care",
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
        "Specialty Type",
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
        "Days of the week",
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
    "0269": ("Charge On Indicator", (("O", "O"), ("R", "R"))),
    "0270": (
        "Document Type",
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
    "0272": ("Document Confidentiality Status", (("R", "R"), ("U", "U"), ("V", "V"))),
    "0273": (
        "Document Availability Status",
        (("AV", "AV"), ("CA", "CA"), ("OB", "OB"), ("UN", "UN")),
    ),
    "0275": (
        "Document Storage Status",
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
        "Appointment Type Codes",
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
            ("Noshow", "Noshow"),
            ("Overbook", "Overbook"),
            ("Pending", "Pending"),
            ("Started", "Started"),
            ("Waitlist", "Waitlist"),
        ),
    ),
    "0279": (
        "Allow Substitution Codes",
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
    "0283": ("Referral status", (("A", "A"), ("E", "E"), ("P", "P"), ("R", "R"))),
    "0284": ("Referral category", (("A", "A"), ("E", "E"), ("I", "I"), ("O", "O"))),
    "0285": ("Insurance Company ID Codes", ()),
    "0286": ("Provider role", (("CP", "CP"), ("PP", "PP"), ("RP", "RP"), ("RT", "RT"))),
    "0287": (
        "Problem / goal action code",
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
    "0288": ("Census Tract", ()),
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
            ("Octet - stream", "Octet - stream"),
            ("PICT", "PICT"),
            ("PostScript", "PostScript"),
            ("RTF", "RTF"),
            ("SGML", "SGML"),
            ("TIFF", "TIFF"),
            ("x - hl7 - cda - level - one", "x - hl7 - cda - level - one"),
            ("XML", "XML"),
        ),
    ),
    "0292": (
        "Vaccines administered(code=CVX)(parenteral, unless oral is noted)",
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
            ("100", "100"),
            ("101", "101"),
            ("102", "102"),
            ("103", "103"),
            ("104", "104"),
            ("105", "105"),
            ("106", "106"),
            ("107", "107"),
            ("108", "108"),
            ("109", "109"),
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
            ("93", "93"),
            ("94", "94"),
            ("95", "95"),
            ("96", "96"),
            ("97", "97"),
            ("98", "98"),
            ("99", "99"),
            ("998", "998"),
            ("999", "999"),
        ),
    ),
    "0293": ("Billing Category", ()),
    "0294": (
        "Time selection criteria parameter class codes",
        (
            ("Fri", "Fri"),
            ("Mon", "Mon"),
            ("Prefend", "Prefend"),
            ("Prefstart", "Prefstart"),
            ("Sat", "Sat"),
            ("Sun", "Sun"),
            ("Thu", "Thu"),
            ("Tue", "Tue"),
            ("Wed", "Wed"),
        ),
    ),
    "0295": ("Handicap", ()),
    "0296": ("Primary Language", ()),
    "0297": ("CN ID Source", ()),
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
            ("L, M, N", "L, M, N"),
            ("Random", "Usually a base64 encoded string of random bits"),
            ("URI", "Uniform Resource Identifier"),
            ("UUID", "The DCE Universal Unique Identifier"),
            ("x400", "An X.400 MHS format identifier"),
            ("x500", "An X.500 directory name"),
        ),
    ),
    "0302": ("Point of Care", ()),
    "0303": ("Room", ()),
    "0304": ("Bed", ()),
    "0305": (
        "Person location type",
        (
            ("C", "Clinic"),
            ("D", "Department"),
            ("H", "Home"),
            ("N", "Nursing Unit"),
            ("O", "Provider's Office"),
            ("P", "Phone"),
            ("S", "SNF"),
        ),
    ),
    "0306": ("Location Status", ()),
    "0307": ("Building", ()),
    "0308": ("Floor", ()),
    "0309": (
        "Coverage Type",
        (
            ("B", "Both hospital and physician"),
            ("H", "Hospital/institutional"),
            ("P", "Physician/professional"),
        ),
    ),
    "0311": ("Job Status", (("O", "O"), ("P", "P"), ("T", "T"), ("U", "U"))),
    "0312": ("Policy Scope", ()),
    "0313": ("Policy Source", ()),
    "0315": (
        "Living Will Code",
        (("F", "F"), ("I", "I"), ("N", "N"), ("U", "U"), ("Y", "Y")),
    ),
    "0316": (
        "Organ Donor Code",
        (
            ("F", "F"),
            ("I", "I"),
            ("N", "N"),
            ("P", "P"),
            ("R", "R"),
            ("U", "U"),
            ("Y", "Y"),
        ),
    ),
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
        "Dispense Method",
        (
            ("AD", "Automatic Dispensing"),
            ("F", "Floor Stock"),
            ("TR", "Traditional"),
            ("UD", "Unit Dose"),
        ),
    ),
    "0322": (
        "Completion Status for valid values.",
        (
            ("CP", "Complete"),
            ("NA", "Not Administered"),
            ("PA", "Partially Administered"),
            ("RE", "Refused"),
        ),
    ),
    "0323": (
        "Action Code",
        (("A", "Add/Insert"), ("D", "Delete"), ("U", "Update"), ("X", "No change")),
    ),
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
        "Location Relationship ID",
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
    "0326": ("Visit Indicator", (("A", "A"), ("V", "V"))),
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
    "0332": ("Source type", (("A", "Accept"), ("I", "Initiate"))),
    "0333": ("Network change type", (("M", "M"), ("SD", "SD"), ("SU", "SU"))),
    "0334": (
        "Disabled Person Code",
        (("AP", "AP"), ("GT", "GT"), ("IN", "IN"), ("PT", "PT")),
    ),
    "0335": (
        "Repeat pattern",
        (
            ("A", "A"),
            ("BID", "BID"),
            ("C", "C"),
            ("D", "D"),
            ("I", "I"),
            ("M", "M"),
            ("Meal Related Timings", "Meal Related Timings"),
            ("Once", "Once"),
            ("P", "P"),
            ("PRN", "PRN"),
            ("PRNxxx", "PRNxxx"),
            ("QAM", "QAM"),
            ("QHS", "QHS"),
            ("QID", "QID"),
            ("Q < integer > D", "Q < integer > D"),
            ("Q < integer > H", "Q < integer > H"),
            ("Q < integer > J < day  # >", "Q < integer > J < day  # >"),
            ("Q<integer>L", "Q<integer>L"),
            ("Q<integer>M", "Q<integer>M"),
            ("Q<integer>S", "Q<integer>S"),
            ("Q<integer>W", "Q<integer>W"),
            ("QOD", "QOD"),
            ("QPM", "QPM"),
            ("QSHIFT", "QSHIFT"),
            ("TID", "TID"),
            ("U <spec>", "U <spec>"),
            ("V", "V"),
            ("xID", "xID"),
        ),
    ),
    "0336": ("Referral reason", (("O", "O"), ("P", "P"), ("S", "S"), ("W", "W"))),
    "0337": ("Certification status", (("C", "C"), ("E", "E"))),
    "0338": (
        "Practitioner ID number type",
        (
            ("CY", "County number"),
            ("DEA", "Drug Enforcement Agency no."),
            ("GL", "General ledger number"),
            ("LI", "LI"),
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
        "Patient_s Relationship to Insured",
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
            ("ADR_A19", "ADR_A19"),
            ("ADT_A01", "ADT_A01"),
            ("ADT_A02", "ADT_A02"),
            ("ADT_A03", "ADT_A03"),
            ("ADT_A05", "ADT_A05"),
            ("ADT_A06", "ADT_A06"),
            ("ADT_A09", "ADT_A09"),
            ("ADT_A15", "ADT_A15"),
            ("ADT_A16", "ADT_A16"),
            ("ADT_A17", "ADT_A17"),
            ("ADT_A18", "ADT_A18"),
            ("ADT_A20", "ADT_A20"),
            ("ADT_A21", "ADT_A21"),
            ("ADT_A24", "ADT_A24"),
            ("ADT_A30", "ADT_A30"),
            ("ADT_A37", "ADT_A37"),
            ("ADT_A38", "ADT_A38"),
            ("ADT_A39", "ADT_A39"),
            ("ADT_A43", "ADT_A43"),
            ("ADT_A45", "ADT_A45"),
            ("ADT_A50", "ADT_A50"),
            ("ADT_A52", "ADT_A52"),
            ("ADT_A54", "ADT_A54"),
            ("ADT_A60", "ADT_A60"),
            ("ADT_A61", "ADT_A61"),
            ("BAR_P01", "BAR_P01"),
            ("BAR_P02", "BAR_P02"),
            ("BAR_P05", "BAR_P05"),
            ("BAR_P06", "BAR_P06"),
            ("BAR_P10", "BAR_P10"),
            ("BAR_P12", "BAR_P12"),
            ("BPS_O29", "BPS_O29"),
            ("BRP_030", "BRP_030"),
            ("BRT_O32", "BRT_O32"),
            ("BTS_O31", "BTS_O31"),
            ("CRM_C01", "CRM_C01"),
            ("CSU_C09", "CSU_C09"),
            ("DFT_P03", "DFT_P03"),
            ("DFT_P11", "DFT_P11"),
            ("DOC_T12", "DOC_T12"),
            ("DSR_P04", "DSR_P04"),
            ("DSR_Q01", "DSR_Q01"),
            ("DSR_Q03", "DSR_Q03"),
            ("EAC_U07", "EAC_U07"),
            ("EAN_U09", "EAN_U09"),
            ("EAR_U08", "EAR_U08"),
            ("EDR_R07", "EDR_R07"),
            ("EQQ_Q04", "EQQ_Q04"),
            ("ERP_R09", "ERP_R09"),
            ("ESR_U02", "ESR_U02"),
            ("ESU_U01", "ESU_U01"),
            ("INR_U06", "INR_U06"),
            ("INU_U05", "INU_U05"),
            ("LSU_U12", "LSU_U12"),
            ("MDM_T01", "MDM_T01"),
            ("MDM_T02", "MDM_T02"),
            ("MFD_MFA", "MFD_MFA"),
            ("MFK_M01", "MFK_M01"),
            ("MFN_M01", "MFN_M01"),
            ("MFN_M02", "MFN_M02"),
            ("MFN_M03", "MFN_M03"),
            ("MFN_M04", "MFN_M04"),
            ("MFN_M05", "MFN_M05"),
            ("MFN_M06", "MFN_M06"),
            ("MFN_M07", "MFN_M07"),
            ("MFN_M08", "MFN_M08"),
            ("MFN_M09", "MFN_M09"),
            ("MFN_M10", "MFN_M10"),
            ("MFN_M11", "MFN_M11"),
            ("MFN_M12", "MFN_M12"),
            ("MFN_M13", "MFN_M13"),
            ("MFN_M15", "MFN_M15"),
            ("MFQ_M01", "MFQ_M01"),
            ("MFR_M01", "MFR_M01"),
            ("NMD_N02", "NMD_N02"),
            ("NMQ_N01", "NMQ_N01"),
            ("NMR_N01", "NMR_N01"),
            ("OMB_O27", "OMB_O27"),
            ("OMD_O03", "OMD_O03"),
            ("OMG_O19", "OMG_O19"),
            ("OMI_O23", "OMI_O23"),
            ("OML_O21", "OML_O21"),
            ("OML_O33", "OML_O33"),
            ("OML_O35", "OML_O35"),
            ("OMN_O07", "OMN_O07"),
            ("OMP_O09", "OMP_O09"),
            ("OMS_O05", "OMS_O05"),
            ("ORB_O28", "ORB_O28"),
            ("ORD_O04", "ORD_O04"),
            ("ORF_R04", "ORF_R04"),
            ("ORG_O20", "ORG_O20"),
            ("ORI_O24", "ORI_O24"),
            ("ORL_O22", "ORL_O22"),
            ("ORL_O34", "ORL_O34"),
            ("ORL_O36", "ORL_O36"),
            ("ORM_O01", "ORM_O01"),
            ("ORN_O08", "ORN_O08"),
            ("ORP_O10", "ORP_O10"),
            ("ORR_O02", "ORR_O02"),
            ("ORS_O06", "ORS_O06"),
            ("ORU_R01", "ORU_R01"),
            ("ORU_R30", "ORU_R30"),
            ("ORU_R31", "ORU_R31"),
            ("ORU_R32", "ORU_R32"),
            ("ORU_W01", "ORU_W01"),
            ("OSQ_Q06", "OSQ_Q06"),
            ("OSR_Q06", "OSR_Q06"),
            ("OUL_R21", "OUL_R21"),
            ("OUL_R22", "OUL_R22"),
            ("OUL_R23", "OUL_R23"),
            ("OUL_R24", "OUL_R24"),
            ("PEX_P07", "PEX_P07"),
            ("PGL_PC6", "PGL_PC6"),
            ("PMU_B01", "PMU_B01"),
            ("PMU_B03", "PMU_B03"),
            ("PMU_B04", "PMU_B04"),
            ("PMU_B07", "PMU_B07"),
            ("PMU_B08", "PMU_B08"),
            ("PPG_PCG", "PPG_PCG"),
            ("PPP_PCB", "PPP_PCB"),
            ("PPR_PC1", "PPR_PC1"),
            ("PPT_PCL", "PPT_PCL"),
            ("PPV_PCA", "PPV_PCA"),
            ("PRR_PC5", "PRR_PC5"),
            ("PTR_PCF", "PTR_PCF"),
            ("QBP_Q11", "QBP_Q11"),
            ("QBP_Q13", "QBP_Q13"),
            ("QBP_Q15", "QBP_Q15"),
            ("QBP_Q21", "QBP_Q21"),
            ("QCK_Q02", "QCK_Q02"),
            ("QCN_J01", "QCN_J01"),
            ("QRF_W02", "QRF_W02"),
            ("QRY_A19", "QRY_A19"),
            ("QRY_P04", "QRY_P04"),
            ("QRY_PC4", "QRY_PC4"),
            ("QRY_Q01", "QRY_Q01"),
            ("QRY_Q02", "QRY_Q02"),
            ("QRY_R02", "QRY_R02"),
            ("QRY_T12", "QRY_T12"),
            ("QSB_Q16", "QSB_Q16"),
            ("QVR_Q17", "QVR_Q17"),
            ("RAR_RAR", "RAR_RAR"),
            ("RAS_O17", "RAS_O17"),
            ("RCI_I05", "RCI_I05"),
            ("RCL_I06", "RCL_I06"),
            ("RDE_O01", "RDE_O01"),
            ("RDE_O11", "RDE_O11"),
            ("RDR_RDR", "RDR_RDR"),
            ("RDS_O13", "RDS_O13"),
            ("RDY_K15", "RDY_K15"),
            ("REF_I12", "REF_I12"),
            ("RER_RER", "RER_RER"),
            ("RGR_RGR", "RGR_RGR"),
            ("RGV_O15", "RGV_O15"),
            ("ROR_ROR", "ROR_ROR"),
            ("RPA_I08", "RPA_I08"),
            ("RPI_I01", "RPI_I01"),
            ("RPL_I02", "RPL_I02"),
            ("RPR_I03", "RPR_I03"),
            ("RQA_I08", "RQA_I08"),
            ("RQC_I05", "RQC_I05"),
            ("RQI_I01", "RQI_I01"),
            ("RQP_I04", "RQP_I04"),
            ("RQQ_Q09", "RQQ_Q09"),
            ("RRA_O02", "RRA_O02"),
            ("RRA_O18", "RRA_O18"),
            ("RRD_O14", "RRD_O14"),
            ("RRE_O12", "RRE_O12"),
            ("RRG_O16", "RRG_O16"),
            ("RRI_I12", "RRI_I12"),
            ("RSP_K11", "RSP_K11"),
            ("RSP_K21", "RSP_K21"),
            ("RSP_K22", "RSP_K22"),
            ("RSP_K23", "RSP_K23"),
            ("RTB_K13", "RTB_K13"),
            ("SIU_S12", "SIU_S12"),
            ("SPQ_Q08", "SPQ_Q08"),
            ("SQM_S25", "SQM_S25"),
            ("SQR_S25", "SQR_S25"),
            ("SRM_S01", "SRM_S01"),
            ("SRR_S01", "SRR_S01"),
            ("SSR_U04", "SSR_U04"),
            ("SSU_U03", "SSU_U03"),
            ("SUR_P09", "SUR_P09"),
            ("TBR_R08", "TBR_R08"),
            ("TBR_R09", "TBR_R09"),
            ("TCU_U10", "TCU_U10"),
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
        (("2.3", "2.3"), ("ISO 2022-1994", "ISO 2022-1994"), ("<null>", "<null>")),
    ),
    "0357": (
        "Message error condition codes",
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
    "0359": ("Diagnosis Priority", (("0", "0"), ("1", "1"), ("2 _", "2 _"))),
    "0360": (
        "Degree/license/certificate",
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
            ("BSN", "BSN"),
            ("BT", "BT"),
            ("CANP", "CANP"),
            ("CER", "CER"),
            ("CMA", "CMA"),
            ("CNM", "CNM"),
            ("CNP", "CNP"),
            ("CNS", "CNS"),
            ("CPNP", "CPNP"),
            ("CRN", "CRN"),
            ("DBA", "DBA"),
            ("DED", "DED"),
            ("DIP", "DIP"),
            ("DO", "DO"),
            ("EMT", "EMT"),
            ("EMTP", "EMTP"),
            ("FPNP", "FPNP"),
            ("HS", "HS"),
            ("JD", "JD"),
            ("MA", "MA"),
            ("MBA", "MBA"),
            ("MCE", "MCE"),
            ("MD", "MD"),
            ("MDA", "MDA"),
            ("MDI", "MDI"),
            ("ME", "ME"),
            ("MED", "MED"),
            ("MEE", "MEE"),
            ("MFA", "MFA"),
            ("MME", "MME"),
            ("MS", "MS"),
            ("MSL", "MSL"),
            ("MSN", "MSN"),
            ("MT", "MT"),
            ("NG", "NG"),
            ("NP", "NP"),
            ("PA", "PA"),
            ("PharmD", "PharmD"),
            ("PHD", "PHD"),
            ("PHE", "PHE"),
            ("PHS", "PHS"),
            ("PN", "PN"),
            ("RMA", "RMA"),
            ("RPH", "RPH"),
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
    "0365": (
        "Equipment state",
        (
            ("CL", "CL"),
            ("CO", "CO"),
            ("ES", "ES"),
            ("ID", "ID"),
            ("IN", "IN"),
            ("OP", "OP"),
            ("PA", "PA"),
            ("PD", "PD"),
            ("PU", "PU"),
        ),
    ),
    "0366": ("Local/remote control state", (("L", "L"), ("R", "R"))),
    "0367": ("Alert level", (("C", "C"), ("N", "N"), ("S", "S"), ("W", "W"))),
    "0368": (
        "Remote control command",
        (
            ("AB", "AB"),
            ("CL", "CL"),
            ("CN", "CN"),
            ("DI", "DI"),
            ("EN", "EN"),
            ("ES", "ES"),
            ("EX", "EX"),
            ("IN", "IN"),
            ("LC", "LC"),
            ("LK", "LK"),
            ("LO", "LO"),
            ("PA", "PA"),
            ("RC", "RC"),
            ("RE", "RE"),
            ("SA", "SA"),
            ("SU", "SU"),
            ("TT", "TT"),
            ("UC", "UC"),
            ("UN", "UN"),
        ),
    ),
    "0369": (
        "Specimen Role",
        (
            ("B", "Blind Sample"),
            ("C", "Calibrator, used for initial setting of calibration"),
            (
                "E",
                "Electronic QC, used with manufactured reference providing signals that simulate QC results",
            ),
            (
                "F",
                "Specimen used for testing proficiency of the organization performing the testing (Filler)",
            ),
            (
                "G",
                "Group (where a specimen consists of multiple individual elements that are not individually identified)",
            ),
            (
                "L",
                "Pool (aliquots of individual specimens combined to form a single specimen representing all of the components.)",
            ),
            ("O", "Specimen used for testing Operator Proficiency"),
            ("P", "Patient (default if blank component value)"),
            ("Q", "Control specimen"),
            ("R", "Replicate (of patient sample as a control)"),
            ("V", "Verifying Calibrator, used for periodic calibration checks"),
        ),
    ),
    "0370": (
        "Container status",
        (
            ("I", "I"),
            ("L", "L"),
            ("M", "M"),
            ("O", "O"),
            ("P", "P"),
            ("R", "R"),
            ("U", "U"),
            ("X", "X"),
        ),
    ),
    "0371": (
        "Additive/Preservative",
        (
            ("ACDA", "ACDA"),
            ("ACDB", "ACDB"),
            ("ACET", "ACET"),
            ("AMIES", "AMIES"),
            ("BACTM", "BACTM"),
            ("BF10", "BF10"),
            ("BOR", "BOR"),
            ("BOUIN", "BOUIN"),
            ("BSKM", "BSKM"),
            ("C32", "C32"),
            ("C38", "C38"),
            ("CARS", "CARS"),
            ("CARY", "CARY"),
            ("CHLTM", "CHLTM"),
            ("CTAD", "CTAD"),
            ("EDTK", "EDTK"),
            ("EDTK15", "EDTK15"),
            ("EDTK75", "EDTK75"),
            ("EDTN", "EDTN"),
            ("ENT", "ENT"),
            ("ENT+", "ENT+"),
            ("F10", "F10"),
            ("FDP", "FDP"),
            ("FL10", "FL10"),
            ("FL100", "FL100"),
            ("HCL6", "HCL6"),
            ("HEPA", "HEPA"),
            ("HEPL", "HEPL"),
            ("HEPN", "HEPN"),
            ("HNO3", "HNO3"),
            ("JKM", "JKM"),
            ("KARN", "KARN"),
            ("KOX", "KOX"),
            ("LIA", "LIA"),
            ("M4", "M4"),
            ("M4RT", "M4RT"),
            ("M5", "M5"),
            ("MICHTM", "MICHTM"),
            ("MMDTM", "MMDTM"),
            ("NAF", "NAF"),
            ("NAPS", "NAPS"),
            ("NONE", "NONE"),
            ("PAGE", "PAGE"),
            ("PHENOL", "PHENOL"),
            ("PVA", "PVA"),
            ("RLM", "RLM"),
            ("SILICA", "SILICA"),
            ("SPS", "SPS"),
            ("SST", "SST"),
            ("STUTM", "STUTM"),
            ("THROM", "THROM"),
            ("THYMOL", "THYMOL"),
            ("THYO", "THYO"),
            ("TOLU", "TOLU"),
            ("URETM", "URETM"),
            ("VIRTM", "VIRTM"),
            ("WEST", "WEST"),
        ),
    ),
    "0372": (
        "Specimen component",
        (
            ("BLD", "BLD"),
            ("BSEP", "BSEP"),
            ("PLAS", "PLAS"),
            ("PPP", "PPP"),
            ("PRP", "PRP"),
            ("SED", "SED"),
            ("SER", "SER"),
            ("SUP", "SUP"),
        ),
    ),
    "0373": (
        "Treatment",
        (
            ("ACID", "ACID"),
            ("ALK", "ALK"),
            ("DEFB", "DEFB"),
            ("FILT", "FILT"),
            ("LDLP", "LDLP"),
            ("NEUT", "NEUT"),
            ("RECA", "RECA"),
            ("UFIL", "UFIL"),
        ),
    ),
    "0374": ("System induced contaminants", (("CNTM", "CNTM"),)),
    "0375": ("Artificial blood", (("FLUR", "FLUR"), ("SFHB", "SFHB"))),
    "0376": (
        "Special Handling Code",
        (
            ("AMB", "AMB"),
            ("C37", "C37"),
            ("CAMB", "CAMB"),
            ("CATM", "CATM"),
            ("CFRZ", "CFRZ"),
            ("CREF", "CREF"),
            ("DFRZ", "DFRZ"),
            ("DRY", "DRY"),
            ("FRZ", "FRZ"),
            ("MTLF", "MTLF"),
            ("NTR", "NTR"),
            ("PRTL", "PRTL"),
            ("PSA", "PSA"),
            ("PSO", "PSO"),
            ("REF", "REF"),
            ("UFRZ", "UFRZ"),
            ("UPR", "UPR"),
        ),
    ),
    "0377": ("Other environmental factors", (("A60", "A60"), ("ATM", "ATM"))),
    "0378": ("Carrier Type", ()),
    "0379": ("Tray Type", ()),
    "0380": ("Separator Type", ()),
    "0381": ("Cap Type", ()),
    "0382": ("Drug Interference", ()),
    "0383": (
        "Substance status",
        (
            ("CE", "CE"),
            ("CW", "CW"),
            ("EE", "EE"),
            ("EW", "EW"),
            ("NE", "NE"),
            ("NW", "NW"),
            ("OE", "OE"),
            ("OK", "OK"),
            ("OW", "OW"),
            ("QE", "QE"),
            ("QW", "QW"),
        ),
    ),
    "0384": (
        "Substance type",
        (
            ("CO", "CO"),
            ("DI", "DI"),
            ("LI", "LI"),
            ("LW", "LW"),
            ("MR", "MR"),
            ("OT", "OT"),
            ("PT", "PT"),
            ("PW", "PW"),
            ("RC", "RC"),
            ("SC", "SC"),
            ("SR", "SR"),
            ("SW", "SW"),
        ),
    ),
    "0385": ("Manufacturer Identifier", (("u2026", "u2026"),)),
    "0386": ("Supplier Identifier", (("u2026", "u2026"),)),
    "0387": (
        "Command response",
        (("ER", "ER"), ("OK", "OK"), ("ST", "ST"), ("TI", "TI"), ("UN", "UN")),
    ),
    "0388": ("Processing type", (("E", "E"), ("P", "P"))),
    "0389": ("Analyte repeat status", (("D", "D"), ("F", "F"), ("O", "O"), ("R", "R"))),
    "0391": (
        "Segment group",
        (
            ("OBRG", "OBRG"),
            ("ORCG", "ORCG"),
            ("PIDG", "PIDG"),
            ("RXAG", "RXAG"),
            ("RXDG", "RXDG"),
            ("RXEG", "RXEG"),
            ("RXOG", "RXOG"),
        ),
    ),
    "0392": ("Match reason", (("DB", "DB"), ("NA", "NA"), ("NP", "NP"), ("SS", "SS"))),
    "0393": (
        "Match algorithms",
        (("LINKSOFT_2.01", "LINKSOFT_2.01"), ("MATCHWARE_1.2", "MATCHWARE_1.2")),
    ),
    "0394": ("Response modality", (("B", "B"), ("R", "R"), ("T", "T"))),
    "0395": ("Modify indicator", (("M", "M"), ("N", "N"))),
    "0396": (
        "Coding system",
        (
            ("L", "L"),
            ("ACR", "ACR"),
            ("ANS+", "ANS+"),
            ("ART", "ART"),
            ("AS4", "AS4"),
            ("AS4E", "AS4E"),
            ("ATC", "ATC"),
            ("C4", "C4"),
            ("C5", "C5"),
            ("CAS", "CAS"),
            ("CD2", "CD2"),
            ("CDCA", "CDCA"),
            ("CDCM", "CDCM"),
            ("CDS", "CDS"),
            ("CE", "CE"),
            ("CLP", "CLP"),
            ("CPTM", "CPTM"),
            ("CST", "CST"),
            ("CVX", "CVX"),
            ("DCM", "DCM"),
            ("E", "E"),
            ("E5", "E5"),
            ("E6", "E6"),
            ("E7", "E7"),
            ("ENZC", "ENZC"),
            ("FDDC", "FDDC"),
            ("FDDX", "FDDX"),
            ("FDK", "FDK"),
            ("HB", "HB"),
            ("HCPCS", "HCPCS"),
            ("HCPT", "HCPT"),
            ("HHC", "HHC"),
            ("HI", "HI"),
            ("HL7nnnn", "HL7nnnn"),
            ("HOT", "HOT"),
            ("HPC", "HPC"),
            ("I10", "I10"),
            ("I10P", "I10P"),
            ("I9", "I9"),
            ("I9C", "I9C"),
            ("IBT", "IBT"),
            ("IBTnnnn", "IBTnnnn"),
            ("IC2", "IC2"),
            ("ICD10AM", "ICD10AM"),
            ("ICD10CA", "ICD10CA"),
            ("ICDO", "ICDO"),
            ("ICS", "ICS"),
            ("ICSD", "ICSD"),
            ("ISO+", "ISO+"),
            ("ISOnnnn", "ISOnnnn"),
            ("IUPC", "IUPC"),
            ("IUPP", "IUPP"),
            ("JC10", "JC10"),
            ("JC8", "JC8"),
            ("JJ1017", "JJ1017"),
            ("LB", "LB"),
            ("LN", "LN"),
            ("MCD", "MCD"),
            ("MCR", "MCR"),
            ("MDDX", "MDDX"),
            ("MEDC", "MEDC"),
            ("MEDR", "MEDR"),
            ("MEDX", "MEDX"),
            ("MGPI", "MGPI"),
            ("MVX", "MVX"),
            ("NDA", "NDA"),
            ("NDC", "NDC"),
            ("NIC", "NIC"),
            ("NPI", "NPI"),
            ("NUBC", "NUBC"),
            ("OHA", "OHA"),
            ("POS", "POS"),
            ("RC", "RC"),
            ("SDM", "SDM"),
            ("SNM", "SNM"),
            ("SNM3", "SNM3"),
            ("SNT", "SNT"),
            ("UC", "UC"),
            ("UMD", "UMD"),
            ("UML", "UML"),
            ("UPC", "UPC"),
            ("UPIN", "UPIN"),
            ("USPS", "USPS"),
            ("W1", "W1"),
            ("W2", "W2"),
            ("W4", "W4"),
            ("WC", "WC"),
            ("NABM", "NABM"),
            ("99IHE", "99IHE"),
        ),
    ),
    "0397": (
        "Sequencing",
        (("A", "A"), ("AN", "AN"), ("D", "D"), ("DN", "DN"), ("N", "N")),
    ),
    "0398": ("Continuation style code", (("F", "F"), ("I", "I"))),
    "0399": (
        "Country code",
        (
            ("AFG", "AFG"),
            ("ALB", "ALB"),
            ("DZA", "DZA"),
            ("ASM", "ASM"),
            ("AND", "AND"),
            ("AGO", "AGO"),
            ("AIA", "AIA"),
            ("ATG", "ATG"),
            ("ARG", "ARG"),
            ("ARM", "ARM"),
            ("ABW", "ABW"),
            ("AUS", "AUS"),
            ("AZE", "AZE"),
            ("BHS", "BHS"),
            ("BHR", "BHR"),
            ("BGD", "BGD"),
            ("BRB", "BRB"),
            ("BLR", "BLR"),
            ("BLZ", "BLZ"),
            ("BEN", "BEN"),
            ("BMU", "BMU"),
            ("BTN", "BTN"),
            ("BOL", "BOL"),
            ("BIH", "BIH"),
            ("BWA", "BWA"),
            ("BRA", "BRA"),
            ("BRN", "BRN"),
            ("BFA", "BFA"),
            ("BDI", "BDI"),
            ("KHM", "KHM"),
            ("CMR", "CMR"),
            ("CAN", "CAN"),
            ("CPV", "CPV"),
            ("CYM", "CYM"),
            ("CAF", "CAF"),
            ("TCD", "TCD"),
            ("CHL", "CHL"),
            ("CHN", "CHN"),
            ("COL", "COL"),
            ("COM", "COM"),
            ("COG", "COG"),
            ("COD", "COD"),
            ("COK", "COK"),
            ("CRI", "CRI"),
            ("CIV", "CIV"),
            ("HRV", "HRV"),
            ("CUB", "CUB"),
            ("DJI", "DJI"),
            ("DMA", "DMA"),
            ("DOM", "DOM"),
            ("ECU", "ECU"),
            ("EGY", "EGY"),
            ("SLV", "SLV"),
            ("GNQ", "GNQ"),
            ("ERI", "ERI"),
            ("ETH", "ETH"),
            ("FLK", "FLK"),
            ("FRO", "FRO"),
            ("FJI", "FJI"),
            ("GUF", "GUF"),
            ("PYF", "PYF"),
            ("GAB", "GAB"),
            ("GMB", "GMB"),
            ("GEO", "GEO"),
            ("GHA", "GHA"),
            ("GIB", "GIB"),
            ("GRC", "GRC"),
            ("GRL", "GRL"),
            ("GRD", "GRD"),
            ("GLP", "GLP"),
            ("GUM", "GUM"),
            ("GTM", "GTM"),
            ("GIN", "GIN"),
            ("GNB", "GNB"),
            ("GUY", "GUY"),
            ("HTI", "HTI"),
            ("VAT", "VAT"),
            ("HND", "HND"),
            ("HKG", "HKG"),
            ("ISL", "ISL"),
            ("IND", "IND"),
            ("IDN", "IDN"),
            ("IRN", "IRN"),
            ("IRQ", "IRQ"),
            ("ISR", "ISR"),
            ("JAM", "JAM"),
            ("JPN", "JPN"),
            ("JOR", "JOR"),
            ("KAZ", "KAZ"),
            ("KEN", "KEN"),
            ("KIR", "KIR"),
            ("PRK", "PRK"),
            ("KOR", "KOR"),
            ("KWT", "KWT"),
            ("KGZ", "KGZ"),
            ("LAO", "LAO"),
            ("LBN", "LBN"),
            ("LSO", "LSO"),
            ("LBR", "LBR"),
            ("LBY", "LBY"),
            ("LIE", "LIE"),
            ("MAC", "MAC"),
            ("MKD", "MKD"),
            ("MDG", "MDG"),
            ("MWI", "MWI"),
            ("MYS", "MYS"),
            ("MDV", "MDV"),
            ("MLI", "MLI"),
            ("MHL", "MHL"),
            ("MTQ", "MTQ"),
            ("MRT", "MRT"),
            ("MUS", "MUS"),
            ("MEX", "MEX"),
            ("FSM", "FSM"),
            ("MDA", "MDA"),
            ("MCO", "MCO"),
            ("MNG", "MNG"),
            ("MSR", "MSR"),
            ("MAR", "MAR"),
            ("MOZ", "MOZ"),
            ("MMR", "MMR"),
            ("NAM", "NAM"),
            ("NRU", "NRU"),
            ("NPL", "NPL"),
            ("ANT", "ANT"),
            ("NCL", "NCL"),
            ("NZL", "NZL"),
            ("NIC", "NIC"),
            ("NER", "NER"),
            ("NGA", "NGA"),
            ("NIU", "NIU"),
            ("NFK", "NFK"),
            ("MNP", "MNP"),
            ("NOR", "NOR"),
            ("OMN", "OMN"),
            ("PAK", "PAK"),
            ("PLW", "PLW"),
            ("PAN", "PAN"),
            ("PNG", "PNG"),
            ("PRY", "PRY"),
            ("PER", "PER"),
            ("PHL", "PHL"),
            ("PCN", "PCN"),
            ("PRI", "PRI"),
            ("QAT", "QAT"),
            ("REU", "REU"),
            ("RUS", "RUS"),
            ("RWA", "RWA"),
            ("SHN", "SHN"),
            ("KNA", "KNA"),
            ("LCA", "LCA"),
            ("SPM", "SPM"),
            ("VCT", "VCT"),
            ("WSM", "WSM"),
            ("SMR", "SMR"),
            ("STP", "STP"),
            ("SAU", "SAU"),
            ("SEN", "SEN"),
            ("SYC", "SYC"),
            ("SLE", "SLE"),
            ("SGP", "SGP"),
            ("SLB", "SLB"),
            ("SOM", "SOM"),
            ("ZAF", "ZAF"),
            ("LKA", "LKA"),
            ("SDN", "SDN"),
            ("SUR", "SUR"),
            ("SJM", "SJM"),
            ("SWZ", "SWZ"),
            ("CHE", "CHE"),
            ("SYR", "SYR"),
            ("TWN", "TWN"),
            ("TJK", "TJK"),
            ("TZA", "TZA"),
            ("THA", "THA"),
            ("TGO", "TGO"),
            ("TKL", "TKL"),
            ("TON", "TON"),
            ("TTO", "TTO"),
            ("TUN", "TUN"),
            ("TUR", "TUR"),
            ("TKM", "TKM"),
            ("TCA", "TCA"),
            ("TUV", "TUV"),
            ("UGA", "UGA"),
            ("UKR", "UKR"),
            ("ARE", "ARE"),
            ("USA", "USA"),
            ("URY", "URY"),
            ("UZB", "UZB"),
            ("VUT", "VUT"),
            ("VEN", "VEN"),
            ("VNM", "VNM"),
            ("VGB", "VGB"),
            ("VIR", "VIR"),
            ("WLF", "WLF"),
            ("ESH", "ESH"),
            ("YEM", "YEM"),
            ("ZMB", "ZMB"),
            ("ZWE", "ZWE"),
            ("AUT", "AUT"),
            ("BEL", "BEL"),
            ("CYP", "CYP"),
            ("CZE", "CZE"),
            ("DNK", "DNK"),
            ("EST", "EST"),
            ("FIN", "FIN"),
            ("FRA", "FRA"),
            ("DEU", "DEU"),
            ("HUN", "HUN"),
            ("IRL", "IRL"),
            ("ITA", "ITA"),
            ("LVA", "LVA"),
            ("LTU", "LTU"),
            ("LUX", "LUX"),
            ("MLT", "MLT"),
            ("NLD", "NLD"),
            ("POL", "POL"),
            ("PRT", "PRT"),
            ("SVK", "SVK"),
            ("SVN", "SVN"),
            ("ESP", "ESP"),
            ("SWE", "SWE"),
            ("GBR", "GBR"),
            ("ROM", "ROM"),
            ("BGR", "BGR"),
        ),
    ),
    "0401": ("Government reimbursement program", (("C", "C"), ("MM", "MM"))),
    "0402": ("School type", (("D", "D"), ("G", "G"), ("M", "M"), ("U", "U"))),
    "0403": (
        "Language Ability",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5")),
    ),
    "0404": (
        "Language Proficiency",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5"), ("6", "6")),
    ),
    "0405": ("Organization Unit", ()),
    "0406": (
        "Organization unit type",
        (
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("H", "H"),
            ("O", "O"),
        ),
    ),
    "0409": ("Application change type", (("M", "M"), ("SD", "SD"), ("SU", "SU"))),
    "0411": (
        "Supplemental service information values",
        (
            ("1ST", "1ST"),
            ("2ND", "2ND"),
            ("3RD", "3RD"),
            ("4TH", "4TH"),
            ("5TH", "5TH"),
            ("ANT", "ANT"),
            ("A/P", "A/P"),
            ("BLT", "BLT"),
            ("DEC", "DEC"),
            ("DST", "DST"),
            ("LAT", "LAT"),
            ("LFT", "LFT"),
            ("LLQ", "LLQ"),
            ("LOW", "LOW"),
            ("LUQ", "LUQ"),
            ("MED", "MED"),
            ("OR", "OR"),
            ("PED", "PED"),
            ("POS", "POS"),
            ("PRT", "PRT"),
            ("PRX", "PRX"),
            ("REC", "REC"),
            ("RGH", "RGH"),
            ("RLQ", "RLQ"),
            ("RUQ", "RUQ"),
            ("UPP", "UPP"),
            ("UPR", "UPR"),
            ("WCT", "WCT"),
            ("WOC", "WOC"),
            ("WSD", "WSD"),
        ),
    ),
    "0412": ("Category Identifier", ()),
    "0413": ("Consent Identifier", ()),
    "0414": ("Units of Time", ()),
    "0415": ("DRG Transfer Type", (("E", "E"), ("N", "N"))),
    "0416": (
        "Procedure DRG Type",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5")),
    ),
    "0417": (
        "Tissue Type Code",
        (
            ("0", "0"),
            ("1", "1"),
            ("2", "2"),
            ("3", "3"),
            ("4", "4"),
            ("5", "5"),
            ("6", "6"),
            ("7", "7"),
            ("8", "8"),
            ("9", "9"),
            ("B", "B"),
            ("C", "C"),
            ("G", "G"),
        ),
    ),
    "0418": ("Procedure Priority", (("0", "0"), ("1", "1"), ("2 _", "2 _"))),
    "0421": ("Severity of Illness Code", (("MI", "MI"), ("MO", "MO"), ("SE", "SE"))),
    "0422": (
        "Triage Code",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5"), ("99", "99")),
    ),
    "0423": ("Case Category Code", (("D", "D"),)),
    "0424": ("Gestation Category Code", (("1", "1"), ("2", "2"), ("3", "3"))),
    "0425": (
        "Newborn Code",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5")),
    ),
    "0426": (
        "Blood Product Code",
        (
            ("CRYO", "CRYO"),
            ("CRYOP", "CRYOP"),
            ("FFP", "FFP"),
            ("FFPTH", "FFPTH"),
            ("PC", "PC"),
            ("PCA", "PCA"),
            ("PCNEO", "PCNEO"),
            ("PCW", "PCW"),
            ("PLT", "PLT"),
            ("PLTNEO", "PLTNEO"),
            ("PLTP", "PLTP"),
            ("PLTPH", "PLTPH"),
            ("PLTPHLR", "PLTPHLR"),
            ("RWB", "RWB"),
            ("WBA", "WBA"),
        ),
    ),
    "0427": (
        "Risk Management Incident Code",
        (
            ("B", "B"),
            ("C", "C"),
            ("D", "D"),
            ("E", "E"),
            ("F", "F"),
            ("H", "H"),
            ("I", "I"),
            ("J", "J"),
            ("K", "K"),
            ("O", "O"),
            ("P", "P"),
            ("R", "R"),
            ("S", "S"),
            ("T", "T"),
        ),
    ),
    "0428": ("Incident Type Code", (("O", "O"), ("P", "P"), ("U", "U"))),
    "0429": (
        "Production Class Code",
        (
            ("BR", "BR"),
            ("DA", "DA"),
            ("DR", "DR"),
            ("DU", "DU"),
            ("LY", "LY"),
            ("MT", "MT"),
            ("NA", "NA"),
            ("OT", "OT"),
            ("PL", "PL"),
            ("RA", "RA"),
            ("SH", "SH"),
            ("U", "U"),
        ),
    ),
    "0430": (
        "Mode of Arrival Code",
        (
            ("A", "A"),
            ("C", "C"),
            ("F", "F"),
            ("H", "H"),
            ("O", "O"),
            ("P", "P"),
            ("U", "U"),
        ),
    ),
    "0431": (
        "Recreational Drug Use Code",
        (
            ("A", "A"),
            ("C", "C"),
            ("K", "K"),
            ("M", "M"),
            ("O", "O"),
            ("T", "T"),
            ("U", "U"),
        ),
    ),
    "0432": (
        "Admission Level of Care Code",
        (
            ("AC", "AC"),
            ("CH", "CH"),
            ("CO", "CO"),
            ("CR", "CR"),
            ("IM", "IM"),
            ("MO", "MO"),
        ),
    ),
    "0433": (
        "Precaution Code",
        (
            ("A", "A"),
            ("B", "B"),
            ("C", "C"),
            ("D", "D"),
            ("I", "I"),
            ("N", "N"),
            ("O", "O"),
            ("P", "P"),
            ("U", "U"),
        ),
    ),
    "0434": (
        "Patient Condition Code",
        (("A", "A"), ("C", "C"), ("O", "O"), ("P", "P"), ("S", "S"), ("U", "U")),
    ),
    "0435": ("Advance Directive Code", (("DNR", "DNR"),)),
    "0436": (
        "Sensitivity to Causative Agent Code",
        (("AD", "AD"), ("AL", "AL"), ("CT", "CT"), ("IN", "IN")),
    ),
    "0437": ("Alert Device Code", (("B", "B"), ("N", "N"), ("W", "W"))),
    "0438": (
        "Allergy Clinical Status",
        (
            ("C", "C"),
            ("D", "D"),
            ("E", "E"),
            ("I", "I"),
            ("P", "P"),
            ("S", "S"),
            ("U", "U"),
        ),
    ),
    "0440": (
        "Data types",
        (
            ("AD", "AD"),
            ("AUI", "AUI"),
            ("CCD", "CCD"),
            ("CCP", "CCP"),
            ("CD", "CD"),
            ("CE", "CE"),
            ("CF", "CF"),
            ("CK", "CK"),
            ("CM", "CM"),
            ("CN", "CN"),
            ("CNE", "CNE"),
            ("CNS", "CNS"),
            ("CP", "CP"),
            ("CQ", "CQ"),
            ("CSU", "CSU"),
            ("CWE", "CWE"),
            ("CX", "CX"),
            ("DDI", "DDI"),
            ("DIN", "DIN"),
            ("DLD", "DLD"),
            ("DLN", "DLN"),
            ("DLT", "DLT"),
            ("DR", "DR"),
            ("DT", "DT"),
            ("DTM", "DTM"),
            ("DTN", "DTN"),
            ("ED", "ED"),
            ("EI", "EI"),
            ("EIP", "EIP"),
            ("ELD", "ELD"),
            ("ERL", "ERL"),
            ("FC", "FC"),
            ("FN", "FN"),
            ("FT", "FT"),
            ("GTS", "GTS"),
            ("HD", "HD"),
            ("ICD", "ICD"),
            ("ID", "ID"),
            ("IS", "IS"),
            ("JCC", "JCC"),
            ("LA1", "LA1"),
            ("LA2", "LA2"),
            ("MA", "MA"),
            ("MO", "MO"),
            ("MOC", "MOC"),
            ("MOP", "MOP"),
            ("MSG", "MSG"),
            ("NA", "NA"),
            ("NDL", "NDL"),
            ("NM", "NM"),
            ("NR", "NR"),
            ("OCD", "OCD"),
            ("OSD", "OSD"),
            ("OSP", "OSP"),
            ("PIP", "PIP"),
            ("PL", "PL"),
            ("PLN", "PLN"),
            ("PN", "PN"),
            ("PPN", "PPN"),
            ("PRL", "PRL"),
            ("PT", "PT"),
            ("PTA", "PTA"),
            ("QIP", "QIP"),
            ("QSC", "QSC"),
            ("RCD", "RCD"),
            ("RFR", "RFR"),
            ("RI", "RI"),
            ("RMC", "RMC"),
            ("RP", "RP"),
            ("RPT", "RPT"),
            ("SAD", "SAD"),
            ("SCV", "SCV"),
            ("SI", "SI"),
            ("SN", "SN"),
            ("SPD", "SPD"),
            ("SPS", "SPS"),
            ("SRT", "SRT"),
            ("ST", "ST"),
            ("TM", "TM"),
            ("TN", "TN"),
            ("TQ", "TQ"),
            ("TS", "TS"),
            ("TX", "TX"),
            ("UVC", "UVC"),
            ("VH", "VH"),
            ("VID", "VID"),
            ("VR", "VR"),
            ("WVI", "WVI"),
            ("WVS", "WVS"),
            ("XAD", "XAD"),
            ("XCN", "XCN"),
            ("XON", "XON"),
            ("XPN", "XPN"),
            ("XTN", "XTN"),
        ),
    ),
    "0441": (
        "Immunization Registry Status",
        (
            ("A", "Active"),
            ("I", "Inactive"),
            ("L", "Inactive - Lost to follow-up (cancel contract)"),
            ("M", "Inactive - Moved or gone elsewhere (cancel contract)"),
            ("O", "Other"),
            (
                "P",
                "Inactive - Permanently inactive (Do not reactivate or add new entries to the record)",
            ),
            ("U", "Unknown"),
        ),
    ),
    "0442": ("Location Service Code", (("D", "D"), ("E", "E"), ("P", "P"), ("T", "T"))),
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
    "0444": ("Name assembly order", (("F", "F"), ("G", "G"))),
    "0445": (
        "Identity Reliability Code",
        (("AL", "AL"), ("UA", "UA"), ("UD", "UD"), ("US", "US")),
    ),
    "0446": ("Species Code", ()),
    "0447": ("Breed Code", ()),
    "0448": ("Name Context", ()),
    "0450": ("Event type", (("LOG", "LOG"), ("SER", "SER"))),
    "0451": ("Substance identifier", (("ALL", "ALL"),)),
    "0452": ("Health care provider type code", (("SUGGESTION", "SUGGESTION"),)),
    "0453": ("Health care provider classification", (("SUGGESTION", "SUGGESTION"),)),
    "0454": (
        "Health care provider area of specialization",
        (("SUGGESTION", "SUGGESTION"),),
    ),
    "0455": ("Type of Bill Code", ()),
    "0456": ("Revenue code", ()),
    "0457": (
        "Overall Claim Disposition Code",
        (("0", "0"), ("1", "1"), ("2", "2"), ("3", "3"), ("4", "4")),
    ),
    "0458": (
        "OCE Edit Code",
        (
            ("1", "1"),
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
            ("2", "2"),
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
            ("3", "3"),
            ("30", "30"),
            ("31", "31"),
            ("32", "32"),
            ("33", "33"),
            ("34", "34"),
            ("35.", "35."),
            ("36.", "36."),
            ("37", "37"),
            ("38.", "38."),
            ("39.", "39."),
            ("4", "4"),
            ("40.", "40."),
            ("41.", "41."),
            ("42.", "42."),
            ("5", "5"),
            ("6", "6"),
            ("7", "7"),
            ("8", "8"),
            ("9", "9"),
        ),
    ),
    "0459": (
        "Reimbursement Action Code",
        (("0", "0"), ("1", "1"), ("2", "2"), ("3", "3")),
    ),
    "0460": ("Denial or Rejection Code", (("0", "0"), ("1", "1"), ("2", "2"))),
    "0461": ("License Number", ()),
    "0462": ("Location Cost Center", ()),
    "0463": ("Inventory Number", ()),
    "0464": ("Facility ID", ()),
    "0465": ("Name/address representation", (("A", "A"), ("I", "I"), ("P", "P"))),
    "0466": (
        "Ambulatory Payment Classification Code",
        (("031", "031"), ("163", "163"), ("181", "181")),
    ),
    "0467": (
        "Modifier Edit Code",
        (("0", "0"), ("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("U", "U")),
    ),
    "0468": (
        "Payment Adjustment Code",
        (("1", "1"), ("2", "2"), ("3", "3"), ("4", "4"), ("5", "5")),
    ),
    "0469": ("Packaging Status Code", (("0", "0"), ("1", "1"), ("2", "2"))),
    "0470": (
        "Reimbursement Type Code",
        (
            ("Crnl", "Crnl"),
            ("DME", "DME"),
            ("EPO", "EPO"),
            ("Lab", "Lab"),
            ("Mamm", "Mamm"),
            ("NoPay", "NoPay"),
            ("OPPS", "OPPS"),
            ("PartH", "PartH"),
            ("Pckg", "Pckg"),
            ("Thrpy", "Thrpy"),
        ),
    ),
    "0471": ("Query Name", ()),
    "0472": ("TQ conjunction ID", (("A", "A"), ("C", "C"), ("S", "S"))),
    "0473": ("Formulary Status", (("G", "G"), ("N", "N"), ("R", "R"), ("Y", "Y"))),
    "0474": (
        "Organization Unit Type",
        (("D", "D"), ("F", "F"), ("S", "S"), ("U", "U"), ("V", "V")),
    ),
    "0475": (
        "Charge Type Reason",
        (("01", "01"), ("02", "02"), ("03", "03"), ("04", "04"), ("05", "05")),
    ),
    "0476": ("Medically Necessary Duplicate Procedure Reason", ()),
    "0477": (
        "Controlled Substance Schedule*",
        (
            ("I", "I"),
            ("II", "II"),
            ("III", "III"),
            ("IV", "IV"),
            ("V", "V"),
            ("VI", "VI"),
        ),
    ),
    "0478": ("Formulary Status", (("G", "G"), ("N", "N"), ("R", "R"), ("Y", "Y"))),
    "0480": ("Pharmacy Order Types", (("M", "M"), ("O", "O"), ("S", "S"))),
    "0482": ("Order Type", (("I", "I"), ("O", "O"))),
    "0483": (
        "Authorization Mode",
        (
            ("EL", "Electronic"),
            ("EM", "E-mail"),
            ("FX", "Fax"),
            ("IP", "In Person"),
            ("MA", "Mail"),
            ("PA", "Paper"),
            ("PH", "Phone"),
            ("RE", "Reflexive (Automated system)"),
            ("VC", "Video-conference"),
            ("VO", "Voice"),
        ),
    ),
    "0484": (
        "Dispense Type",
        (
            ("B", "B"),
            ("C", "C"),
            ("N", "N"),
            ("P", "P"),
            ("Q", "Q"),
            ("R", "R"),
            ("S", "S"),
            ("T", "T"),
            ("Z", "Z"),
        ),
    ),
    "0485": (
        "Extended Priority Codes",
        (
            ("A", "A"),
            ("C", "C"),
            ("P", "P"),
            ("PRN", "PRN"),
            ("R", "R"),
            ("S", "S"),
            ("T", "T"),
            ("TD<integer>", "TD<integer>"),
            ("TH<integer>", "TH<integer>"),
            ("TL<integer>", "TL<integer>"),
            ("TM<integer>", "TM<integer>"),
            ("TS<integer>", "TS<integer>"),
            ("TW<integer>", "TW<integer>"),
        ),
    ),
    "0487": (
        "Specimen Type",
        (
            ("ABS", "ABS"),
            ("AMN", "AMN"),
            ("ASP", "ASP"),
            ("BIFL", "BIFL"),
            ("BLDA", "BLDA"),
            ("BBL", "BBL"),
            ("BLDC", "BLDC"),
            ("BPU", "BPU"),
            ("BLDV", "BLDV"),
            ("BON", "BON"),
            ("BRO", "BRO"),
            ("BRN", "BRN"),
            ("CALC", "CALC"),
            ("CDM", "CDM"),
            ("CNL", "CNL"),
            ("CTP", "CTP"),
            ("CSF", "CSF"),
            ("CVM", "CVM"),
            ("CVX", "CVX"),
            ("COL", "COL"),
            ("BLDCO", "BLDCO"),
            ("CNJT", "CNJT"),
            ("CUR", "CUR"),
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
            ("EYE", "EYE"),
            ("EXG", "EXG"),
            ("FLT", "FLT"),
            ("FIST", "FIST"),
            ("FLU", "FLU"),
            ("GAS", "GAS"),
            ("GAST", "GAST"),
            ("GEN", "GEN"),
            ("GENC", "GENC"),
            ("GENL", "GENL"),
            ("GENV", "GENV"),
            ("HAR", "HAR"),
            ("IHG", "IHG"),
            ("IT", "IT"),
            ("ISLT", "ISLT"),
            ("LAM", "LAM"),
            ("LN", "LN"),
            ("LNA", "LNA"),
            ("LNV", "LNV"),
            ("LIQ", "LIQ"),
            ("MAR", "MAR"),
            ("MEC", "MEC"),
            ("MBLD", "MBLD"),
            ("MLK", "MLK"),
            ("MILK", "MILK"),
            ("NAIL", "NAIL"),
            ("NOS", "NOS"),
            ("ORH", "ORH"),
            ("PAFL", "PAFL"),
            ("PRT", "PRT"),
            ("PLC", "PLC"),
            ("PLAS", "PLAS"),
            ("PLB", "PLB"),
            ("PLR", "PLR"),
            ("PPP", "PPP"),
            ("PRP", "PRP"),
            ("PUS", "PUS"),
            ("RT", "RT"),
            ("SAL", "SAL"),
            ("SMN", "SMN"),
            ("SER", "SER"),
            ("SKN", "SKN"),
            ("SKM", "SKM"),
            ("SPRM", "SPRM"),
            ("SPT", "SPT"),
            ("SPTC", "SPTC"),
            ("SPTT", "SPTT"),
            ("STL", "STL"),
            ("SWT", "SWT"),
            ("SNV", "SNV"),
            ("TEAR", "TEAR"),
            ("THRT", "THRT"),
            ("TISS", "TISS"),
            ("TISG", "TISG"),
            ("TLGI", "TLGI"),
            ("TLNG", "TLNG"),
            ("TISPL", "TISPL"),
            ("TSMI", "TSMI"),
            ("TISU", "TISU"),
            ("TUB", "TUB"),
            ("ULC", "ULC"),
            ("UMB", "UMB"),
            ("UMED", "UMED"),
            ("URTH", "URTH"),
            ("UR", "UR"),
            ("URC", "URC"),
            ("URT", "URT"),
            ("URNS", "URNS"),
            ("USUB", "USUB"),
            ("VITF", "VITF"),
            ("VOM", "VOM"),
            ("BLD", "BLD"),
            ("BDY", "BDY"),
            ("WAT", "WAT"),
            ("WICK", "WICK"),
            ("WND", "WND"),
            ("WNDA", "WNDA"),
            ("WNDE", "WNDE"),
            ("WNDD", "WNDD"),
        ),
    ),
    "0488": (
        "Specimen Collection Method",
        (
            ("ANP", "ANP"),
            ("BAP", "BAP"),
            ("BCAE", "BCAE"),
            ("BCAN", "BCAN"),
            ("BCPD", "BCPD"),
            ("BIO", "BIO"),
            ("CAP", "CAP"),
            ("CATH", "CATH"),
            ("CVP", "CVP"),
            ("EPLA", "EPLA"),
            ("ESWA", "ESWA"),
            ("FNA", "FNA"),
            ("KOFFP", "KOFFP"),
            ("LNA", "LNA"),
            ("LNV", "LNV"),
            ("MARTL", "MARTL"),
            ("ML11", "ML11"),
            ("MLP", "MLP"),
            ("NYP", "NYP"),
            ("PACE", "PACE"),
            ("PIN", "PIN"),
            ("PNA", "PNA"),
            ("PRIME", "PRIME"),
            ("PUMP", "PUMP"),
            ("QC5", "QC5"),
            ("SCLP", "SCLP"),
            ("SCRAPS", "SCRAPS"),
            ("SHA", "SHA"),
            ("SWA", "SWA"),
            ("SWD", "SWD"),
            ("TMAN", "TMAN"),
            ("TMCH", "TMCH"),
            ("TMM4", "TMM4"),
            ("TMMY", "TMMY"),
            ("TMOT", "TMOT"),
            ("TMP", "TMP"),
            ("TMPV", "TMPV"),
            ("TMSC", "TMSC"),
            ("TMUP", "TMUP"),
            ("TMVI", "TMVI"),
            ("VENIP", "VENIP"),
            ("WOOD", "WOOD"),
        ),
    ),
    "0489": (
        "Risk Codes",
        (
            ("AGG", "Aggressive"),
            ("BHZ", "Biohazard"),
            ("BIO", "Biological"),
            ("COR", "Corrosive"),
            ("ESC", "Escape Risk"),
            ("EXP", "Explosive"),
            ("IFL", "MaterialDangerInflammable"),
            ("INF", "MaterialDangerInfectious"),
            ("INJ", "Injury Hazard"),
            ("POI", "Poison"),
            ("RAD", "Radioactive"),
        ),
    ),
    "0490": (
        "Specimen Reject Reason",
        (
            ("EX", "Expired"),
            ("QS", "Quantity not sufficient"),
            ("RA", "Missing patient ID number"),
            ("RB", "Broken container"),
            ("RC", "Clotting"),
            ("RD", "Missing collection date"),
            ("RE", "Missing patient name"),
            ("RH", "Hemolysis"),
            ("RI", "Identification problem"),
            ("RM", "Labeling"),
            ("RN", "Contamination"),
            ("RP", "Missing phlebotomist ID"),
            ("RR", "Improper storage"),
            ("RS", "Name misspelling"),
        ),
    ),
    "0491": (
        "Specimen Quality",
        (("E", "Excellent"), ("F", "Fair"), ("G", "Good"), ("P", "Poor")),
    ),
    "0492": (
        "Specimen Appropriateness",
        (("??", "??"), ("A", "A"), ("I", "I"), ("P", "P")),
    ),
    "0493": (
        "Specimen Condition",
        (
            ("AUT", "Autolyzed"),
            ("CLOT", "Clotted"),
            ("CON", "Contaminated"),
            ("COOL", "Cool"),
            ("FROZ", "Frozen"),
            ("HEM", "Hemolyzed"),
            ("LIVE", "Live"),
            ("ROOM", "Room temperature"),
            ("SNR", "Sample not received"),
        ),
    ),
    "0494": (
        "Specimen Child Role",
        (
            ("A", "Aliquot"),
            ("C", "Component"),
            ("M", "Modified from original specimen"),
        ),
    ),
    "0495": (
        "Body Site Modifier",
        (
            ("ANT", "ANT"),
            ("BIL", "BIL"),
            ("DIS", "DIS"),
            ("EXT", "EXT"),
            ("L", "L"),
            ("LAT", "LAT"),
            ("LLQ", "LLQ"),
            ("LOW", "LOW"),
            ("LUQ", "LUQ"),
            ("MED", "MED"),
            ("POS", "POS"),
            ("PRO", "PRO"),
            ("R", "R"),
            ("RLQ", "RLQ"),
            ("RUQ", "RUQ"),
            ("u00a0UPP", "u00a0UPP"),
        ),
    ),
    "0496": (
        "Consent Type",
        (
            ("001", "001"),
            ("002", "002"),
            ("003", "003"),
            ("004", "004"),
            ("005", "005"),
            ("006", "006"),
            ("007", "007"),
            ("008", "008"),
            ("009", "009"),
            ("010", "010"),
            ("011", "011"),
            ("012", "012"),
            ("013", "013"),
            ("014", "014"),
            ("015", "015"),
            ("016", "016"),
            ("017", "017"),
            ("018", "018"),
            ("019", "019"),
            ("020", "020"),
            ("021", "021"),
            ("022", "022"),
            ("023", "023"),
            ("024", "024"),
            ("025", "025"),
            ("026", "026"),
            ("027", "027"),
            ("028", "028"),
            ("029", "029"),
            ("030", "030"),
            ("031", "031"),
            ("032", "032"),
            ("033", "033"),
            ("034", "034"),
            ("035", "035"),
            ("036", "036"),
            ("037", "037"),
            ("038", "038"),
            ("039", "039"),
            ("040", "040"),
            ("041", "041"),
            ("042", "042"),
            ("043", "043"),
            ("044", "044"),
            ("045", "045"),
            ("046", "046"),
            ("047", "047"),
            ("048", "048"),
            ("049", "049"),
            ("050", "050"),
            ("051", "051"),
            ("052", "052"),
            ("053", "053"),
            ("054", "054"),
            ("055", "055"),
            ("056", "056"),
            ("057", "057"),
            ("058", "058"),
            ("059", "059"),
            ("060", "060"),
            ("061", "061"),
            ("062", "062"),
            ("063", "063"),
            ("064", "064"),
            ("065", "065"),
            ("066", "066"),
            ("067", "067"),
            ("068", "068"),
            ("069", "069"),
            ("070", "070"),
            ("071", "071"),
            ("072", "072"),
            ("073", "073"),
            ("074", "074"),
            ("075", "075"),
            ("076", "076"),
            ("077", "077"),
            ("078", "078"),
            ("079", "079"),
            ("080", "080"),
            ("081", "081"),
            ("082", "082"),
            ("083", "083"),
            ("084", "084"),
            ("085", "085"),
            ("086", "086"),
            ("087", "087"),
            ("088", "088"),
            ("089", "089"),
            ("090", "090"),
            ("091", "091"),
            ("092", "092"),
            ("093", "093"),
            ("094", "094"),
            ("095", "095"),
            ("096", "096"),
            ("097", "097"),
            ("098", "098"),
            ("099", "099"),
            ("100", "100"),
            ("101", "101"),
            ("102", "102"),
            ("103", "103"),
            ("104", "104"),
            ("105", "105"),
            ("106", "106"),
            ("107", "107"),
            ("108", "108"),
            ("109", "109"),
            ("110", "110"),
            ("111", "111"),
            ("112", "112"),
            ("113", "113"),
            ("1137", "1137"),
            ("114", "114"),
            ("115", "115"),
            ("116", "116"),
            ("117", "117"),
            ("118", "118"),
            ("119", "119"),
            ("120", "120"),
            ("121", "121"),
            ("122", "122"),
            ("123", "123"),
            ("124", "124"),
            ("125", "125"),
            ("126", "126"),
            ("127", "127"),
            ("128", "128"),
            ("129", "129"),
            ("130", "130"),
            ("131", "131"),
            ("132", "132"),
            ("133", "133"),
            ("134", "134"),
            ("135", "135"),
            ("136", "136"),
        ),
    ),
    "0497": ("Consent Mode", (("T", "T"), ("V", "V"), ("W", "W"))),
    "0498": (
        "Consent Status",
        (("A", "A"), ("B", "B"), ("L", "L"), ("P", "P"), ("R", "R"), ("X", "X")),
    ),
    "0499": ("Consent Bypass Reason", (("E", "E"), ("PJ", "PJ"))),
    "0500": ("Consent Disclosure Level", (("F", "F"), ("N", "N"), ("P", "P"))),
    "0501": ("Consent Non-Disclosure Reason", (("E", "E"), ("PR", "PR"), ("RX", "RX"))),
    "0502": (
        "Non-Subject Consenter Reason",
        (("LM", "LM"), ("MIN", "MIN"), ("NC", "NC")),
    ),
    "0503": ("Sequence/Results Flag", (("C", "C"), ("R", "R"), ("S", "S"))),
    "0504": (
        "Sequence Condition Code",
        (("EE", "EE"), ("ES", "ES"), ("SE", "SE"), ("SS", "SS")),
    ),
    "0505": ("Cyclic Entry/Exit Indicator", (("*", "*"), ("#", "#"))),
    "0506": (
        "Service Request Relationship",
        (("C", "C"), ("E", "E"), ("N", "N"), ("S", "S"), ("T", "T")),
    ),
    "0507": ("Observation Result Handling", (("F", "F"), ("N", "N"))),
    "0508": (
        "Blood Product Processing Requirements",
        (
            ("AU", "AU"),
            ("CM", "CM"),
            ("CS", "CS"),
            ("DI", "DI"),
            ("FR", "FR"),
            ("HB", "HB"),
            ("HL", "HL"),
            ("IG", "IG"),
            ("IR", "IR"),
            ("LR", "LR"),
            ("WA", "WA"),
        ),
    ),
    "0509": ("Indication for Use", ()),
    "0510": (
        "Blood Product Dispense Status",
        (
            ("CR", "CR"),
            ("DS", "DS"),
            ("PT", "PT"),
            ("RA", "RA"),
            ("RD", "RD"),
            ("RE", "RE"),
            ("RI", "RI"),
            ("RL", "RL"),
            ("RQ", "RQ"),
            ("RS", "RS"),
            ("WA", "WA"),
        ),
    ),
    "0511": (
        "BP Observation Status Codes Interpretation",
        (("C", "C"), ("D", "D"), ("F", "F"), ("O", "O"), ("P", "P"), ("W", "W")),
    ),
    "0512": ("Commercial Product", ()),
    "0513": (
        "Blood Product Transfusion/Disposition Status",
        (("RA", "RA"), ("RL", "RL"), ("TR", "TR"), ("TX", "TX"), ("WA", "WA")),
    ),
    "0514": (
        "Transfusion Adverse Reaction",
        (
            ("ABOINC", "ABOINC"),
            ("ACUTHEHTR", "ACUTHEHTR"),
            ("ALLERGIC1", "ALLERGIC1"),
            ("ALLERGIC2", "ALLERGIC2"),
            ("ALLERGICR", "ALLERGICR"),
            ("ANAPHYLAC", "ANAPHYLAC"),
            ("BACTCONTAM", "BACTCONTAM"),
            ("DELAYEDHTR", "DELAYEDHTR"),
            ("DELAYEDSTR", "DELAYEDSTR"),
            ("GVHD", "GVHD"),
            ("HYPOTENS", "HYPOTENS"),
            ("NONHTR1", "NONHTR1"),
            ("NONHTR2", "NONHTR2"),
            ("NONHTRREC", "NONHTRREC"),
            ("NONIMMUNE", "NONIMMUNE"),
            ("NONSPEC", "NONSPEC"),
            ("NORXN", "NORXN"),
            ("PTP", "PTP"),
            ("VOLOVER", "VOLOVER"),
        ),
    ),
    "0515": ("Transfusion Interrupted Reason", ()),
    "0516": (
        "Error severity",
        (("E", "Error"), ("I", "Information"), ("W", "Warning")),
    ),
    "0517": (
        "Inform person code",
        (("HD", "HD"), ("NPAT", "NPAT"), ("PAT", "PAT"), ("USR", "USR")),
    ),
    "0518": ("Override type", (("EQV", "EQV"), ("EXTN", "EXTN"), ("INLV", "INLV"))),
    "0519": ("Override reason", ()),
    "0521": ("Override Code", ()),
    "0523": ("Computation type", (("%", "%"), ("a", "a"))),
    "0524": ("Sequence condition", (("C", "C"), ("R", "R"), ("S", "S"))),
    "0525": ("Privilege", ()),
    "0526": ("Privilege Class", ()),
    "0527": (
        "Calendar alignment",
        (
            ("DM", "DM"),
            ("DW", "DW"),
            ("DY", "DY"),
            ("HD", "HD"),
            ("MY", "MY"),
            ("NH", "NH"),
            ("SN", "SN"),
            ("WY", "WY"),
        ),
    ),
    "0528": (
        "Event related period",
        (
            ("AC", "AC"),
            ("ACD", "ACD"),
            ("ACM", "ACM"),
            ("ACV", "ACV"),
            ("HS", "HS"),
            ("IC", "IC"),
            ("ICD", "ICD"),
            ("ICM", "ICM"),
            ("ICV", "ICV"),
            ("PC", "PC"),
            ("PCD", "PCD"),
            ("PCM", "PCM"),
            ("PCV", "PCV"),
        ),
    ),
    "0529": (
        "Precision",
        (("D", "D"), ("H", "H"), ("L", "L"), ("M", "M"), ("S", "S"), ("Y", "Y")),
    ),
    "0530": (
        "Organization, agency, department ",
        (
            ("AE", "AE"),
            ("DEA", "DEA"),
            ("DOD", "DOD"),
            ("MC", "MC"),
            ("VA", "VA"),
            ("VI", "VI"),
        ),
    ),
    "0531": ("Institution", ()),
    "0532": (
        "Expanded yes/no indicator",
        (
            ("ASKU", "ASKU"),
            ("N", "N"),
            ("NA", "NA"),
            ("NASK", "NASK"),
            ("NAV", "NAV"),
            ("NI", "NI"),
            ("NP", "NP"),
            ("UNK", "UNK"),
            ("Y", "Y"),
        ),
    ),
    "0533": ("Application Error Code", ()),
    "0534": (
        "Notify Clergy Code",
        (("L", "L"), ("N", "N"), ("O", "O"), ("U", "U"), ("Y", "Y")),
    ),
    "0535": ("Signature Code", (("C", "C"), ("M", "M"), ("P", "P"), ("S", "S"))),
    "0536": (
        "Certificate Status",
        (("E", "E"), ("I", "I"), ("P", "P"), ("R", "R"), ("V", "V")),
    ),
    "0537": ("Institution", ()),
    "0538": (
        "Institution Relationship Type",
        (("CON", "CON"), ("CST", "CST"), ("EMP", "EMP"), ("VOL", "VOL")),
    ),
    "0539": ("Cost Center Code", ()),
    "0540": ("Inactive Reason Code", (("L", "L"), ("R", "R"), ("T", "T"))),
    "0541": ("Specimen Type Modifier", ()),
    "0542": ("Specimen Source Type Modifier", ()),
    "0543": ("Specimen Collection Site", ()),
    "0544": (
        "Container Condition",
        (
            ("CC", "CC"),
            ("CL", "CL"),
            ("CT", "CT"),
            ("SB", "SB"),
            ("XAMB", "XAMB"),
            ("XC37", "XC37"),
            ("XCAMB", "XCAMB"),
            ("XCATM", "XCATM"),
            ("XCFRZ", "XCFRZ"),
            ("XCREF", "XCREF"),
            ("XDFRZ", "XDFRZ"),
            ("XDRY", "XDRY"),
            ("XFRZ", "XFRZ"),
            ("XMTLF", "XMTLF"),
            ("XNTR", "XNTR"),
            ("XPRTL", "XPRTL"),
            ("XPSA", "XPSA"),
            ("XPSO", "XPSO"),
            ("XREF", "XREF"),
            ("XUFRZ", "XUFRZ"),
            ("XUPR", "XUPR"),
        ),
    ),
    "0547": ("Jurisdictional Breadth", (("C", "C"), ("N", "N"), ("S", "S"))),
    "0548": (
        "Signatory_s Relationship to Subject",
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
    "0549": ("NDC Codes", ()),
    "0550": (
        "Body Parts",
        (
            ("u00a0", "u00a0"),
            ("ACET", "ACET"),
            ("ACHIL", "ACHIL"),
            ("ADB", "ADB"),
            ("ADE", "ADE"),
            ("ADR", "ADR"),
            ("AMN", "AMN"),
            ("AMS", "AMS"),
            ("ANAL", "ANAL"),
            ("ANKL", "ANKL"),
            ("ANTEC", "ANTEC"),
            ("ANTECF", "ANTECF"),
            ("ANTR", "ANTR"),
            ("ANUS", "ANUS"),
            ("AORTA", "AORTA"),
            ("APDX", "APDX"),
            ("AR", "AR"),
            ("AREO", "AREO"),
            ("ARM", "ARM"),
            ("ARTE", "ARTE"),
            ("ASCIT", "ASCIT"),
            ("ASCT", "ASCT"),
            ("ATR", "ATR"),
            ("AURI", "AURI"),
            ("AV", "AV"),
            ("AXI", "AXI"),
            ("BACK", "BACK"),
            ("BARTD", "BARTD"),
            ("BARTG", "BARTG"),
            ("BCYS", "BCYS"),
            ("BDY", "BDY"),
            ("BID", "BID"),
            ("BIFL", "BIFL"),
            ("BLAD", "BLAD"),
            ("BLD", "BLD"),
            ("BLDA", "BLDA"),
            ("BLDC", "BLDC"),
            ("BLDV", "BLDV"),
            ("BLOOD", "BLOOD"),
            ("BMAR", "BMAR"),
            ("BON", "BON"),
            ("BOWEL", "BOWEL"),
            ("BOWLA", "BOWLA"),
            ("BOWSM", "BOWSM"),
            ("BPH", "BPH"),
            ("BRA", "BRA"),
            ("BRAIN", "BRAIN"),
            ("BRO", "BRO"),
            ("BROCH", "BROCH"),
            ("BRONC", "BRONC"),
            ("BROW", "BROW"),
            ("BRST", "BRST"),
            ("BRSTFL", "BRSTFL"),
            ("BRTGF", "BRTGF"),
            ("BRV", "BRV"),
            ("BUCCA", "BUCCA"),
            ("BURSA", "BURSA"),
            ("BURSF", "BURSF"),
            ("BUTT", "BUTT"),
            ("CALF", "CALF"),
            ("CANAL", "CANAL"),
            ("CANLI", "CANLI"),
            ("CANTH", "CANTH"),
            ("CARO", "CARO"),
            ("CARP", "CARP"),
            ("CAVIT", "CAVIT"),
            ("CBLD", "CBLD"),
            ("CDM", "CDM"),
            ("CDUCT", "CDUCT"),
            ("CECUM", "CECUM"),
            ("CERVUT", "CERVUT"),
            ("CHE", "CHE"),
            ("CHEEK", "CHEEK"),
            ("CHES", "CHES"),
            ("CHESTu00a0", "CHESTu00a0"),
            ("CHIN", "CHIN"),
            ("CIRCU", "CIRCU"),
            ("CLAVI", "CLAVI"),
            ("CLIT", "CLIT"),
            ("CLITO", "CLITO"),
            ("CNL", "CNL"),
            ("COCCG", "COCCG"),
            ("COCCY", "COCCY"),
            ("COLON", "COLON"),
            ("COLOS", "COLOS"),
            ("CONJ", "CONJ"),
            ("COR", "COR"),
            ("CORAL", "CORAL"),
            ("CORD", "CORD"),
            ("CORN", "CORN"),
            ("COS", "COS"),
            ("CRANE", "CRANE"),
            ("CRANF", "CRANF"),
            ("CRANO", "CRANO"),
            ("CRANP", "CRANP"),
            ("CRANS", "CRANS"),
            ("CRANT", "CRANT"),
            ("CSF", "CSF"),
            ("CUBIT", "CUBIT"),
            ("CUFF", "CUFF"),
            ("CULD", "CULD"),
            ("CULDO", "CULDO"),
            ("CVX", "CVX"),
            ("DELT", "DELT"),
            ("DEN", "DEN"),
            ("DENTA", "DENTA"),
            ("DIAF", "DIAF"),
            ("DIGIT", "DIGIT"),
            ("DISC", "DISC"),
            ("DORS", "DORS"),
            ("DPH", "DPH"),
            ("DUFL", "DUFL"),
            ("DUODE", "DUODE"),
            ("DUR", "DUR"),
            ("EAR", "EAR"),
            ("EARBI", "EARBI"),
            ("EARBM", "EARBM"),
            ("EARBS", "EARBS"),
            ("EARLO", "EARLO"),
            ("EC", "EC"),
            ("ELBOW", "ELBOW"),
            ("ELBOWJ", "ELBOWJ"),
            ("ENDC", "ENDC"),
            ("ENDM", "ENDM"),
            ("EOLPH", "EOLPH"),
            ("EOS", "EOS"),
            ("EPD", "EPD"),
            ("EPICA", "EPICA"),
            ("EPICM", "EPICM"),
            ("EPIDU", "EPIDU"),
            ("EPIGL", "EPIGL"),
            ("ESO", "ESO"),
            ("ESOPG", "ESOPG"),
            ("ET", "ET"),
            ("ETHMO", "ETHMO"),
            ("EUR", "EUR"),
            ("EYE", "EYE"),
            ("EYELI", "EYELI"),
            ("FACE", "FACE"),
            ("FALLT", "FALLT"),
            ("FBINC", "FBINC"),
            ("FBLAC", "FBLAC"),
            ("FBMAX", "FBMAX"),
            ("FBNAS", "FBNAS"),
            ("FBPAL", "FBPAL"),
            ("FBVOM", "FBVOM"),
            ("FBZYG", "FBZYG"),
            ("FEMOR", "FEMOR"),
            ("FEMUR", "FEMUR"),
            ("FET", "FET"),
            ("FIBU", "FIBU"),
            ("FING", "FING"),
            ("FINGN", "FINGN"),
            ("FMH", "FMH"),
            ("FOL", "FOL"),
            ("FOOT", "FOOT"),
            ("FOREA", "FOREA"),
            ("FOREH", "FOREH"),
            ("FORES", "FORES"),
            ("FOURC", "FOURC"),
            ("GB", "GB"),
            ("GEN", "GEN"),
            ("GENC", "GENC"),
            ("GENL", "GENL"),
            ("GL", "GL"),
            ("GLAND", "GLAND"),
            ("GLANS", "GLANS"),
            ("GLUT", "GLUT"),
            ("GLUTE", "GLUTE"),
            ("GLUTM", "GLUTM"),
            ("GROIN", "GROIN"),
            ("GUM", "GUM"),
            ("GVU", "GVU"),
            ("HAL", "HAL"),
            ("HAND", "HAND"),
            ("HAR", "HAR"),
            ("HART", "HART"),
            ("HEAD", "HEAD"),
            ("HEEL", "HEEL"),
            ("HEM", "HEM"),
            ("HIP", "HIP"),
            ("HIPJ", "HIPJ"),
            ("HUMER", "HUMER"),
            ("HV", "HV"),
            ("HVB", "HVB"),
            ("HVT", "HVT"),
            ("HYMEN", "HYMEN"),
            ("ICX", "ICX"),
            ("ILC", "ILC"),
            ("ILCON", "ILCON"),
            ("ILCR", "ILCR"),
            ("ILE", "ILE"),
            ("ILEOS", "ILEOS"),
            ("ILEUM", "ILEUM"),
            ("ILIAC", "ILIAC"),
            ("INASA", "INASA"),
            ("INGUI", "INGUI"),
            ("INSTL", "INSTL"),
            ("INSTS", "INSTS"),
            ("INT", "INT"),
            ("INTRO", "INTRO"),
            ("INTRU", "INTRU"),
            ("ISCHI", "ISCHI"),
            ("ISH", "ISH"),
            ("JAW", "JAW"),
            ("JUGI", "JUGI"),
            ("KIDNu00a0", "KIDNu00a0"),
            ("KNEE", "KNEE"),
            ("KNEEF", "KNEEF"),
            ("KNEEJ", "KNEEJ"),
            ("LABIA", "LABIA"),
            ("LABMA", "LABMA"),
            ("LABMI", "LABMI"),
            ("LACRI", "LACRI"),
            ("LAM", "LAM"),
            ("LARYN", "LARYN"),
            ("LEG", "LEG"),
            ("LENS", "LENS"),
            ("LING", "LING"),
            ("LINGU", "LINGU"),
            ("LIP", "LIP"),
            ("LIVER", "LIVER"),
            ("LMN", "LMN"),
            ("LN", "LN"),
            ("LNG", "LNG"),
            ("LOBE", "LOBE"),
            ("LOCH", "LOCH"),
            ("LUMBA", "LUMBA"),
            ("LUNG", "LUNG"),
            ("LYM", "LYM"),
            ("MAC", "MAC"),
            ("MALLE", "MALLE"),
            ("MANDI", "MANDI"),
            ("MAR", "MAR"),
            ("MAST", "MAST"),
            ("MAXIL", "MAXIL"),
            ("MAXS", "MAXS"),
            ("MEATU", "MEATU"),
            ("MEC", "MEC"),
            ("MEDST", "MEDST"),
            ("MEDU", "MEDU"),
            ("METAC", "METAC"),
            ("METAT", "METAT"),
            ("MILK", "MILK"),
            ("MITRL", "MITRL"),
            ("MOLAR", "MOLAR"),
            ("MONSU", "MONSU"),
            ("MONSV", "MONSV"),
            ("MOU", "MOU"),
            ("MOUTH", "MOUTH"),
            ("MP", "MP"),
            ("MPB", "MPB"),
            ("MRSA2", "MRSA2"),
            ("MYO", "MYO"),
            ("NAIL", "NAIL"),
            ("NAILB", "NAILB"),
            ("NAILF", "NAILF"),
            ("NAILT", "NAILT"),
            ("NARES", "NARES"),
            ("NASL", "NASL"),
            ("NAVEL", "NAVEL"),
            ("NECK", "NECK"),
            ("NERVE", "NERVE"),
            ("NIPPL", "NIPPL"),
            ("NLACR", "NLACR"),
            ("NOS", "NOS"),
            ("NOSE", "NOSE"),
            ("NOSTR", "NOSTR"),
            ("NP", "NP"),
            ("NSS", "NSS"),
            ("NTRAC", "NTRAC"),
            ("OCCIP", "OCCIP"),
            ("OLECR", "OLECR"),
            ("OMEN", "OMEN"),
            ("ORBIT", "ORBIT"),
            ("ORO", "ORO"),
            ("OSCOX", "OSCOX"),
            ("OVARY", "OVARY"),
            ("PAFL", "PAFL"),
            ("PALAT", "PALAT"),
            ("PALM", "PALM"),
            ("PANAL", "PANAL"),
            ("PANCR", "PANCR"),
            ("PARAT", "PARAT"),
            ("PARIE", "PARIE"),
            ("PARON", "PARON"),
            ("PAROT", "PAROT"),
            ("PAS", "PAS"),
            ("PATEL", "PATEL"),
            ("PCARD", "PCARD"),
            ("PCLIT", "PCLIT"),
            ("PELV", "PELV"),
            ("PENIS", "PENIS"),
            ("PENSH", "PENSH"),
            ("PER", "PER"),
            ("PERI", "PERI"),
            ("PERIH", "PERIH"),
            ("PERIN", "PERIN"),
            ("PERIS", "PERIS"),
            ("PERIT", "PERIT"),
            ("PERIU", "PERIU"),
            ("PERIV", "PERIV"),
            ("PERRA", "PERRA"),
            ("PERT", "PERT"),
            ("PHALA", "PHALA"),
            ("PILO", "PILO"),
            ("PINNA", "PINNA"),
            ("PLACF", "PLACF"),
            ("PLACM", "PLACM"),
            ("PLANT", "PLANT"),
            ("PLATH", "PLATH"),
            ("PLATS", "PLATS"),
            ("PLC", "PLC"),
            ("PLEU", "PLEU"),
            ("PLEUR", "PLEUR"),
            ("PLR", "PLR"),
            ("PNEAL", "PNEAL"),
            ("PNEPH", "PNEPH"),
            ("PNM", "PNM"),
            ("POPLI", "POPLI"),
            ("PORBI", "PORBI"),
            ("PREAU", "PREAU"),
            ("PRERE", "PRERE"),
            ("PROS", "PROS"),
            ("PRST", "PRST"),
            ("PTONS", "PTONS"),
            ("PUBIC", "PUBIC"),
            ("PUL", "PUL"),
            ("RADI", "RADI"),
            ("RADIUS", "RADIUS"),
            ("RBC", "RBC"),
            ("RECTL", "RECTL"),
            ("RECTU", "RECTU"),
            ("RENL", "RENL"),
            ("RIB", "RIB"),
            ("RNP", "RNP"),
            ("RPERI", "RPERI"),
            ("SAC", "SAC"),
            ("SACIL", "SACIL"),
            ("SACRA", "SACRA"),
            ("SACRO", "SACRO"),
            ("SACRU", "SACRU"),
            ("SALGL", "SALGL"),
            ("SCALP", "SCALP"),
            ("SCAPU", "SCAPU"),
            ("SCLAV", "SCLAV"),
            ("SCLER", "SCLER"),
            ("SCLV", "SCLV"),
            ("SCROT", "SCROT"),
            ("SDP", "SDP"),
            ("SEM", "SEM"),
            ("SEMN", "SEMN"),
            ("SEPTU", "SEPTU"),
            ("SEROM", "SEROM"),
            ("SGF", "SGF"),
            ("SHIN", "SHIN"),
            ("SHOL", "SHOL"),
            ("SHOLJ", "SHOLJ"),
            ("SIGMO", "SIGMO"),
            ("SINUS", "SINUS"),
            ("SKENE", "SKENE"),
            ("SKM", "SKM"),
            ("SKULL", "SKULL"),
            ("SOLE", "SOLE"),
            ("SPCOR", "SPCOR"),
            ("SPHEN", "SPHEN"),
            ("SPLN", "SPLN"),
            ("SPRM", "SPRM"),
            ("SPX", "SPX"),
            ("STER", "STER"),
            ("STOM", "STOM"),
            ("STOMA", "STOMA"),
            ("STOOLL", "STOOLL"),
            ("STUMP", "STUMP"),
            ("SUB", "SUB"),
            ("SUBD", "SUBD"),
            ("SUBM", "SUBM"),
            ("SUBME", "SUBME"),
            ("SUBPH", "SUBPH"),
            ("SUBX", "SUBX"),
            ("SUPB", "SUPB"),
            ("SUPRA", "SUPRA"),
            ("SWT", "SWT"),
            ("SWTG", "SWTG"),
            ("SYN", "SYN"),
            ("SYNOL", "SYNOL"),
            ("SYNOV", "SYNOV"),
            ("TARS", "TARS"),
            ("TBRON", "TBRON"),
            ("TCN", "TCN"),
            ("TDUCT", "TDUCT"),
            ("TEAR", "TEAR"),
            ("TEMPL", "TEMPL"),
            ("TEMPO", "TEMPO"),
            ("TESTI", "TESTI"),
            ("THIGH", "THIGH"),
            ("THM", "THM"),
            ("THORA", "THORA"),
            ("THRB", "THRB"),
            ("THUMB", "THUMB"),
            ("THYRD", "THYRD"),
            ("TIBIA", "TIBIA"),
            ("TML", "TML"),
            ("TNL", "TNL"),
            ("TOE", "TOE"),
            ("TOEN", "TOEN"),
            ("TONG", "TONG"),
            ("TONS", "TONS"),
            ("TOOTH", "TOOTH"),
            ("TRCHE", "TRCHE"),
            ("TSK", "TSK"),
            ("ULNA", "ULNA"),
            ("UMB", "UMB"),
            ("UMBL", "UMBL"),
            ("URET", "URET"),
            ("URTH", "URTH"),
            ("USTOM", "USTOM"),
            ("UTER", "UTER"),
            ("UTERI", "UTERI"),
            ("VAGIN", "VAGIN"),
            ("VAL", "VAL"),
            ("VAS", "VAS"),
            ("VASTL", "VASTL"),
            ("VAULT", "VAULT"),
            ("VCSF", "VCSF"),
            ("VCUFF", "VCUFF"),
            ("VEIN", "VEIN"),
            ("VENTG", "VENTG"),
            ("VERMI", "VERMI"),
            ("VERTC", "VERTC"),
            ("VERTL", "VERTL"),
            ("VERTT", "VERTT"),
            ("VESCL", "VESCL"),
            ("VESFLD", "VESFLD"),
            ("VESI", "VESI"),
            ("VESTI", "VESTI"),
            ("VGV", "VGV"),
            ("VITR", "VITR"),
            ("VOC", "VOC"),
            ("VULVA", "VULVA"),
            ("WBC", "WBC"),
            ("WRIST", "WRIST"),
        ),
    ),
    "0552": ("Advanced Beneficiary Notice Override Reason", ()),
    "9999": ("Primary Key Value MFA", ()),
}
