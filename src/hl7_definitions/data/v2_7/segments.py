# src/hl7_definitions/data/v2_7/segments.py
"""HL7 v2.7 segment definitions."""

SEGMENTS = {
    "ABS": (
        "Abstract",
        (
            ("XCN", "Discharge Care Provider", "O", 1, None, "0010"),
            ("CWE", "Transfer Medical Service Code", "O", 1, None, "0069"),
            ("CWE", "Severity Of Illness Code", "O", 1, None, "0421"),
            ("DTM", "Date Time Of Attestation", "O", 1, None, None),
            ("XCN", "Attested By", "O", 1, None, None),
            ("CWE", "Triage Code", "O", 1, None, "0422"),
            ("DTM", "Abstract Completion Date Time", "O", 1, None, None),
            ("XCN", "Abstracted By", "O", 1, None, None),
            ("CWE", "Case Category Code", "O", 1, None, "0423"),
            ("ID", "Caesarian Section Indicator", "O", 1, None, "0136"),
            ("CWE", "Gestation Category Code", "O", 1, None, "0424"),
            ("NM", "Gestation Period Weeks", "O", 1, None, None),
            ("CWE", "Newborn Code", "O", 1, None, "0425"),
            ("ID", "Stillborn Indicator", "O", 1, None, "0136"),
        ),
    ),
    "ACC": (
        "Accident",
        (
            ("DTM", "Accident Date/Time", "O", 1, 26, None),
            ("CWE", "Accident Code", "O", 1, 250, "0050"),
            ("ST", "Accident Location", "O", 1, 25, None),
            ("CWE", "Auto Accident State", "O", 1, 250, "0347"),
            ("ID", "Accident Job Related Indicator", "O", 1, 1, "0136"),
            ("ID", "Accident Death Indicator", "O", 1, 12, "0136"),
            ("XCN", "Entered By", "O", 1, 250, None),
            ("ST", "Accident Description", "O", 1, 25, None),
            ("ST", "Brought In By", "O", 1, 80, None),
            ("ID", "Police Notified Indicator", "O", 1, 1, "0136"),
            ("XAD", "Accident Address", "O", 1, 250, None),
            ("NM", "Degree Of Patient Liability", "O", 1, None, None),
        ),
    ),
    "ADD": ("Addendum", (("ST", "Addendum Continuation Pointer", "O", 1, None, None),)),
    "ADJ": (
        "Adjustment",
        (
            ("EI", "Provider Adjustment Number", "R", 1, None, None),
            ("EI", "Payer Adjustment Number", "R", 1, None, None),
            ("SI", "Adjustment Sequence Number", "R", 1, None, None),
            ("CWE", "Adjustment Category", "R", 1, None, "0564"),
            ("CP", "Adjustment Amount", "O", 0, None, None),
            ("CQ", "Adjustment Quantity", "O", 1, None, "0560"),
            ("CWE", "Adjustment Reason Pa", "O", 0, None, "0565"),
            ("ST", "Adjustment Description", "O", 1, None, None),
            ("NM", "Original Value", "O", 1, None, None),
            ("NM", "Substitute Value", "O", 1, None, None),
            ("CWE", "Adjustment Action", "O", 1, None, "0569"),
            ("EI", "Provider Adjustment Number Cross Reference", "O", 1, None, None),
            (
                "EI",
                "Provider Product Service Line Item Number Cross Reference",
                "O",
                1,
                None,
                None,
            ),
            ("DTM", "Adjustment Date", "R", 1, None, None),
            ("XON", "Responsible Organization", "O", 1, None, None),
        ),
    ),
    "AFF": (
        "Professional Affiliation",
        (
            ("SI", "Set ID AFF", "R", 1, None, None),
            ("XON", "Professional Organization", "R", 1, None, None),
            ("XAD", "Professional Organization Address", "O", 1, None, None),
            (
                "DR",
                "Professional Organization Affiliation Date Range",
                "O",
                0,
                None,
                None,
            ),
            (
                "ST",
                "Professional Affiliation Additional Information",
                "O",
                1,
                None,
                None,
            ),
        ),
    ),
    "AIG": (
        "Appointment Information - General Resource",
        (
            ("SI", "Set ID AIG", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("CWE", "Resource ID", "O", 1, None, None),
            ("CWE", "Resource Type", "R", 1, None, None),
            ("CWE", "Resource Group", "O", 0, None, None),
            ("NM", "Resource Quantity", "O", 1, None, None),
            ("CNE", "Resource Quantity Units", "O", 1, None, None),
            ("DTM", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CNE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CNE", "Duration Units", "O", 1, None, None),
            ("CWE", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CWE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIL": (
        "Appointment Information - Location Resource",
        (
            ("SI", "Set ID AIL", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("PL", "Location Resource ID", "O", 0, None, None),
            ("CWE", "Location Type AIL", "O", 1, None, "0305"),
            ("CWE", "Location Group", "O", 1, None, None),
            ("DTM", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CNE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CNE", "Duration Units", "O", 1, None, None),
            ("CWE", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CWE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIP": (
        "Appointment Information - Personnel Resource",
        (
            ("SI", "Set ID AIP", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("XCN", "Personnel Resource ID", "O", 0, None, None),
            ("CWE", "Resource Type", "O", 1, None, "0182"),
            ("CWE", "Resource Group", "O", 1, None, None),
            ("DTM", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CNE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CNE", "Duration Units", "O", 1, None, None),
            ("CWE", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CWE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIS": (
        "Appointment Information",
        (
            ("SI", "Set ID AIS", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("CWE", "Universal Service Identifier", "R", 1, None, None),
            ("DTM", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CNE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CNE", "Duration Units", "O", 1, None, None),
            ("CWE", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CWE", "Filler Status Code", "O", 1, None, "0278"),
            ("CWE", "Placer Supplemental Service Information", "O", 0, None, "0411"),
            ("CWE", "Filler Supplemental Service Information", "O", 0, None, "0411"),
        ),
    ),
    "AL1": (
        "Patient Allergy Information",
        (
            ("SI", "Set ID - AL1", "R", 1, 4, None),
            ("CWE", "Allergen Type Code", "O", 1, 250, "0127"),
            ("CWE", "Allergen Code/Mnemonic/Description", "R", 1, 250, None),
            ("CWE", "Allergy Severity Code", "O", 1, 250, "0128"),
            ("ST", "Allergy Reaction Code", "O", 0, 15, None),
        ),
    ),
    "ANYHL7SEGMENT": (
        "Any HL7 Segment",
        (
            ("varies", "Abs", "O", 0, None, None),
            ("varies", "Acc", "O", 0, None, None),
            ("varies", "Add", "O", 0, None, None),
            ("varies", "Adj", "O", 0, None, None),
            ("varies", "Aff", "O", 0, None, None),
            ("varies", "Aig", "O", 0, None, None),
            ("varies", "Ail", "O", 0, None, None),
            ("varies", "Aip", "O", 0, None, None),
            ("varies", "Ais", "O", 0, None, None),
            ("varies", "AL1", "O", 0, None, None),
            ("varies", "Apr", "O", 0, None, None),
            ("varies", "Arq", "O", 0, None, None),
            ("varies", "Arv", "O", 0, None, None),
            ("varies", "Aut", "O", 0, None, None),
            ("varies", "Bhs", "O", 0, None, None),
            ("varies", "Blc", "O", 0, None, None),
            ("varies", "Blg", "O", 0, None, None),
            ("varies", "Bpo", "O", 0, None, None),
            ("varies", "Bpx", "O", 0, None, None),
            ("varies", "Bts", "O", 0, None, None),
            ("varies", "Btx", "O", 0, None, None),
            ("varies", "Cdm", "O", 0, None, None),
            ("varies", "Cer", "O", 0, None, None),
            ("varies", "CM0", "O", 0, None, None),
            ("varies", "CM1", "O", 0, None, None),
            ("varies", "CM2", "O", 0, None, None),
            ("varies", "Cns", "O", 0, None, None),
            ("varies", "Con", "O", 0, None, None),
            ("varies", "Csp", "O", 0, None, None),
            ("varies", "Csr", "O", 0, None, None),
            ("varies", "Css", "O", 0, None, None),
            ("varies", "Ctd", "O", 0, None, None),
            ("varies", "Cti", "O", 0, None, None),
            ("varies", "DB1", "O", 0, None, None),
            ("varies", "DG1", "O", 0, None, None),
            ("varies", "Dmi", "O", 0, None, None),
            ("varies", "DRG", "O", 0, None, None),
            ("varies", "Dsc", "O", 0, None, None),
            ("varies", "Dsp", "O", 0, None, None),
            ("varies", "Ecd", "O", 0, None, None),
            ("varies", "Ecr", "O", 0, None, None),
            ("varies", "Edu", "O", 0, None, None),
            ("varies", "Eqp", "O", 0, None, None),
            ("varies", "Equ", "O", 0, None, None),
            ("varies", "Err", "O", 0, None, None),
            ("varies", "Evn", "O", 0, None, None),
            ("varies", "Fac", "O", 0, None, None),
            ("varies", "Fhs", "O", 0, None, None),
            ("varies", "FT1", "O", 0, None, None),
            ("varies", "Fts", "O", 0, None, None),
            ("varies", "Gol", "O", 0, None, None),
            ("varies", "GP1", "O", 0, None, None),
            ("varies", "GP2", "O", 0, None, None),
            ("varies", "GT1", "O", 0, None, None),
            ("varies", "Hxx", "O", 0, None, None),
            ("varies", "Iam", "O", 0, None, None),
            ("varies", "Iar", "O", 0, None, None),
            ("varies", "Iim", "O", 0, None, None),
            ("varies", "Ilt", "O", 0, None, None),
            ("varies", "IN1", "O", 0, None, None),
            ("varies", "IN2", "O", 0, None, None),
            ("varies", "IN3", "O", 0, None, None),
            ("varies", "Inv", "O", 0, None, None),
            ("varies", "Ipc", "O", 0, None, None),
            ("varies", "Ipr", "O", 0, None, None),
            ("varies", "Isd", "O", 0, None, None),
            ("varies", "Itm", "O", 0, None, None),
            ("varies", "Ivc", "O", 0, None, None),
            ("varies", "Ivt", "O", 0, None, None),
            ("varies", "Lan", "O", 0, None, None),
            ("varies", "Lcc", "O", 0, None, None),
            ("varies", "Lch", "O", 0, None, None),
            ("varies", "Ldp", "O", 0, None, None),
            ("varies", "Loc", "O", 0, None, None),
            ("varies", "Lrl", "O", 0, None, None),
            ("varies", "Mfa", "O", 0, None, None),
            ("varies", "Mfe", "O", 0, None, None),
            ("varies", "Mfi", "O", 0, None, None),
            ("varies", "Mrg", "O", 0, None, None),
            ("varies", "Msa", "O", 0, None, None),
            ("varies", "Msh", "O", 0, None, None),
            ("varies", "Nck", "O", 0, None, None),
            ("varies", "Nds", "O", 0, None, None),
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
            ("varies", "OM7", "O", 0, None, None),
            ("varies", "Orc", "O", 0, None, None),
            ("varies", "Org", "O", 0, None, None),
            ("varies", "Ovr", "O", 0, None, None),
            ("varies", "Pac", "O", 0, None, None),
            ("varies", "Pce", "O", 0, None, None),
            ("varies", "Pcr", "O", 0, None, None),
            ("varies", "PD1", "O", 0, None, None),
            ("varies", "Pda", "O", 0, None, None),
            ("varies", "Pdc", "O", 0, None, None),
            ("varies", "Peo", "O", 0, None, None),
            ("varies", "Pes", "O", 0, None, None),
            ("varies", "Pid", "O", 0, None, None),
            ("varies", "Pkg", "O", 0, None, None),
            ("varies", "Pmt", "O", 0, None, None),
            ("varies", "PR1", "O", 0, None, None),
            ("varies", "Pra", "O", 0, None, None),
            ("varies", "Prb", "O", 0, None, None),
            ("varies", "Prc", "O", 0, None, None),
            ("varies", "Prd", "O", 0, None, None),
            ("varies", "Prt", "O", 0, None, None),
            ("varies", "Psg", "O", 0, None, None),
            ("varies", "Psh", "O", 0, None, None),
            ("varies", "Psl", "O", 0, None, None),
            ("varies", "Pss", "O", 0, None, None),
            ("varies", "Pth", "O", 0, None, None),
            ("varies", "PV1", "O", 0, None, None),
            ("varies", "PV2", "O", 0, None, None),
            ("varies", "Pye", "O", 0, None, None),
            ("varies", "Qak", "O", 0, None, None),
            ("varies", "Qid", "O", 0, None, None),
            ("varies", "Qpd", "O", 0, None, None),
            ("varies", "Qrd", "O", 0, None, None),
            ("varies", "Qrf", "O", 0, None, None),
            ("varies", "Qri", "O", 0, None, None),
            ("varies", "Rcp", "O", 0, None, None),
            ("varies", "Rdf", "O", 0, None, None),
            ("varies", "Rdt", "O", 0, None, None),
            ("varies", "Rel", "O", 0, None, None),
            ("varies", "RF1", "O", 0, None, None),
            ("varies", "Rfi", "O", 0, None, None),
            ("varies", "Rgs", "O", 0, None, None),
            ("varies", "Rmi", "O", 0, None, None),
            ("varies", "Rol", "O", 0, None, None),
            ("varies", "RQ1", "O", 0, None, None),
            ("varies", "Rqd", "O", 0, None, None),
            ("varies", "Rxa", "O", 0, None, None),
            ("varies", "Rxc", "O", 0, None, None),
            ("varies", "Rxd", "O", 0, None, None),
            ("varies", "Rxe", "O", 0, None, None),
            ("varies", "Rxg", "O", 0, None, None),
            ("varies", "Rxo", "O", 0, None, None),
            ("varies", "Rxr", "O", 0, None, None),
            ("varies", "Sac", "O", 0, None, None),
            ("varies", "Scd", "O", 0, None, None),
            ("varies", "Sch", "O", 0, None, None),
            ("varies", "Scp", "O", 0, None, None),
            ("varies", "Sdd", "O", 0, None, None),
            ("varies", "Sft", "O", 0, None, None),
            ("varies", "Shp", "O", 0, None, None),
            ("varies", "Sid", "O", 0, None, None),
            ("varies", "Slt", "O", 0, None, None),
            ("varies", "Spm", "O", 0, None, None),
            ("varies", "Stf", "O", 0, None, None),
            ("varies", "Stz", "O", 0, None, None),
            ("varies", "Tcc", "O", 0, None, None),
            ("varies", "Tcd", "O", 0, None, None),
            ("varies", "TQ1", "O", 0, None, None),
            ("varies", "TQ2", "O", 0, None, None),
            ("varies", "Txa", "O", 0, None, None),
            ("varies", "Uac", "O", 0, None, None),
            ("varies", "UB1", "O", 0, None, None),
            ("varies", "UB2", "O", 0, None, None),
            ("varies", "Urd", "O", 0, None, None),
            ("varies", "Urs", "O", 0, None, None),
            ("varies", "Var", "O", 0, None, None),
            ("varies", "Vnd", "O", 0, None, None),
            ("varies", "ZL7", "O", 0, None, None),
            ("varies", "Zxx", "O", 0, None, None),
        ),
    ),
    "APR": (
        "Appointment Preferences",
        (
            ("SCV", "Time Selection Criteria", "O", 0, None, "0294"),
            ("SCV", "Resource Selection Criteria", "O", 0, None, "0294"),
            ("SCV", "Location Selection Criteria", "O", 0, None, "0294"),
            ("NM", "Slot Spacing Criteria", "O", 1, None, None),
            ("SCV", "Filler Override Criteria", "O", 0, None, None),
        ),
    ),
    "ARQ": (
        "Appointment Request",
        (
            ("EI", "Placer Appointment ID", "R", 1, None, None),
            ("EI", "Filler Appointment ID", "O", 1, None, None),
            ("NM", "Occurrence Number", "O", 1, None, None),
            ("EI", "Placer Group Number", "O", 1, None, None),
            ("CWE", "Schedule ID", "O", 1, None, None),
            ("CWE", "Request Event Reason", "O", 1, None, None),
            ("CWE", "Appointment Reason", "O", 1, None, "0276"),
            ("CWE", "Appointment Type", "O", 1, None, "0277"),
            ("NM", "Appointment Duration", "O", 1, None, None),
            ("CNE", "Appointment Duration Units", "O", 1, None, None),
            ("DR", "Requested Start Date Time Range", "O", 0, None, None),
            ("ST", "Priority ARQ", "O", 1, None, None),
            ("RI", "Repeating Interval", "O", 1, None, None),
            ("ST", "Repeating Interval Duration", "O", 1, None, None),
            ("XCN", "Placer Contact Person", "R", 0, None, None),
            ("XTN", "Placer Contact Phone Number", "O", 0, None, None),
            ("XAD", "Placer Contact Address", "O", 0, None, None),
            ("PL", "Placer Contact Location", "O", 1, None, None),
            ("XCN", "Entered By Person", "R", 0, None, None),
            ("XTN", "Entered By Phone Number", "O", 0, None, None),
            ("PL", "Entered By Location", "O", 1, None, None),
            ("EI", "Parent Placer Appointment ID", "O", 1, None, None),
            ("EI", "Parent Filler Appointment ID", "O", 1, None, None),
            ("EI", "Placer Order Number", "O", 0, None, None),
            ("EI", "Filler Order Number", "O", 0, None, None),
        ),
    ),
    "ARV": (
        "Access Restriction",
        (
            ("SI", "Set ID", "O", 1, 4, None),
            ("CNE", "Access Restriction Action Code", "R", 1, 705, "0206"),
            ("CWE", "Access Restriction Value", "R", 1, 705, "0717"),
            ("CWE", "Access Restriction Reason", "O", 0, 705, "0719"),
            ("ST", "Special Access Restriction Instructions", "O", 0, 250, None),
            ("DR", "Access Restriction Date Range", "O", 1, 49, None),
        ),
    ),
    "AUT": (
        "Authorization Information",
        (
            ("CWE", "Authorizing Payor Plan ID", "O", 1, None, "0072"),
            ("CWE", "Authorizing Payor Company ID", "R", 1, None, "0285"),
            ("ST", "Authorizing Payor Company Name", "O", 1, None, None),
            ("DTM", "Authorization Effective Date", "O", 1, None, None),
            ("DTM", "Authorization Expiration Date", "O", 1, None, None),
            ("EI", "Authorization Identifier", "O", 1, None, None),
            ("CP", "Reimbursement Limit", "O", 1, None, None),
            ("CQ", "Requested Number Of Treatments", "O", 1, None, None),
            ("CQ", "Authorized Number Of Treatments", "O", 1, None, None),
            ("DTM", "Process Date", "O", 1, None, None),
            ("CWE", "Requested Discipline S", "O", 0, None, None),
            ("CWE", "Authorized Discipline S", "O", 0, None, None),
        ),
    ),
    "BHS": (
        "Batch Header",
        (
            ("ST", "Batch Field Separator", "R", 1, None, None),
            ("ST", "Batch Encoding Characters", "R", 1, None, None),
            ("HD", "Batch Sending Application", "O", 1, None, None),
            ("HD", "Batch Sending Facility", "O", 1, None, None),
            ("HD", "Batch Receiving Application", "O", 1, None, None),
            ("HD", "Batch Receiving Facility", "O", 1, None, None),
            ("DTM", "Batch Creation Date Time", "O", 1, None, None),
            ("ST", "Batch Security", "O", 1, None, None),
            ("ST", "Batch Name ID Type", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("ST", "Batch Control ID", "O", 1, None, None),
            ("ST", "Reference Batch Control ID", "O", 1, None, None),
            ("HD", "Batch Sending Network Address", "O", 1, None, None),
            ("HD", "Batch Receiving Network Address", "O", 1, None, None),
        ),
    ),
    "BLC": (
        "Blood Code",
        (
            ("CWE", "Blood Product Code", "O", 1, None, "0426"),
            ("CQ", "Blood Amount", "O", 1, None, None),
        ),
    ),
    "BLG": (
        "Billing",
        (
            ("CCD", "When To Charge", "O", 1, None, "0100"),
            ("ID", "Charge Type", "O", 1, None, "0122"),
            ("CX", "Account ID", "O", 1, None, None),
            ("CWE", "Charge Type Reason", "O", 1, None, "0475"),
        ),
    ),
    "BPO": (
        "Blood Product Order",
        (
            ("SI", "Set ID BPO", "R", 1, None, None),
            ("CWE", "Bp Universal Service Identifier", "R", 1, None, "9999"),
            ("CWE", "Bp Processing Requirements", "O", 0, None, "0508"),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CWE", "Bp Units", "O", 1, None, "9999"),
            ("DTM", "Bp Intended Use Date Time", "O", 1, None, None),
            ("PL", "Bp Intended Dispense From Location", "O", 1, None, None),
            ("XAD", "Bp Intended Dispense From Address", "O", 1, None, None),
            ("DTM", "Bp Requested Dispense Date Time", "O", 1, None, None),
            ("PL", "Bp Requested Dispense To Location", "O", 1, None, None),
            ("XAD", "Bp Requested Dispense To Address", "O", 1, None, None),
            ("CWE", "Bp Indication For Use", "O", 0, None, "0509"),
            ("ID", "Bp Informed Consent Indicator", "O", 1, None, "0136"),
        ),
    ),
    "BPX": (
        "Blood Product Dispense Status",
        (
            ("SI", "Set ID BPX", "R", 1, None, None),
            ("CWE", "Bp Dispense Status", "R", 1, None, "0510"),
            ("ID", "Bp Status", "R", 1, None, "0511"),
            ("DTM", "Bp Date Time Of Status", "R", 1, None, None),
            ("EI", "Bc Donation ID", "O", 1, None, None),
            ("CNE", "Bc Component", "O", 1, None, "9999"),
            ("CNE", "Bc Donation Type Intended Use", "O", 1, None, "9999"),
            ("CWE", "Cp Commercial Product", "O", 1, None, "0512"),
            ("XON", "Cp Manufacturer", "O", 1, None, None),
            ("EI", "Cp Lot Number", "O", 1, None, None),
            ("CNE", "Bp Blood Group", "O", 1, None, "9999"),
            ("CNE", "Bc Special Testing", "O", 0, None, "9999"),
            ("DTM", "Bp Expiration Date Time", "O", 1, None, None),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CWE", "Bp Units", "O", 1, None, "9999"),
            ("EI", "Bp Unique ID", "O", 1, None, None),
            ("PL", "Bp Actual Dispensed To Location", "O", 1, None, None),
            ("XAD", "Bp Actual Dispensed To Address", "O", 1, None, None),
            ("XCN", "Bp Dispensed To Receiver", "O", 1, None, None),
            ("XCN", "Bp Dispensing Individual", "O", 1, None, None),
        ),
    ),
    "BTS": (
        "Batch Trailer",
        (
            ("ST", "Batch Message Count", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("NM", "Batch Totals", "O", 0, None, None),
        ),
    ),
    "BTX": (
        "Blood Product Transfusion/Disposition",
        (
            ("SI", "Set ID BTX", "R", 1, None, None),
            ("EI", "Bc Donation ID", "O", 1, None, None),
            ("CNE", "Bc Component", "O", 1, None, "9999"),
            ("CNE", "Bc Blood Group", "O", 1, None, "9999"),
            ("CWE", "Cp Commercial Product", "O", 1, None, "0512"),
            ("XON", "Cp Manufacturer", "O", 1, None, None),
            ("EI", "Cp Lot Number", "O", 1, None, None),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CWE", "Bp Units", "O", 1, None, "9999"),
            ("CWE", "Bp Transfusion Disposition Status", "R", 1, None, "0513"),
            ("ID", "Bp Message Status", "R", 1, None, "0511"),
            ("DTM", "Bp Date Time Of Status", "R", 1, None, None),
            ("XCN", "Bp Transfusion Administrator", "O", 1, None, None),
            ("XCN", "Bp Transfusion Verifier", "O", 1, None, None),
            ("DTM", "Bp Transfusion Start Date Time Of Status", "O", 1, None, None),
            ("DTM", "Bp Transfusion End Date Time Of Status", "O", 1, None, None),
            ("CWE", "Bp Adverse Reaction Type", "O", 0, None, "0514"),
            ("CWE", "Bp Transfusion Interrupted Reason", "O", 1, None, "0515"),
        ),
    ),
    "CDM": (
        "Charge Description Master",
        (
            ("CWE", "Primary Key Value CDM", "R", 1, None, "0132"),
            ("CWE", "Charge Code Alias", "O", 0, None, "0132"),
            ("ST", "Charge Description Short", "R", 1, None, None),
            ("ST", "Charge Description Long", "O", 1, None, None),
            ("CWE", "Description Override Indicator", "O", 1, None, "0268"),
            ("CWE", "Exploding Charges", "O", 0, None, "0132"),
            ("CNE", "Procedure Code", "O", 0, None, "0088"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("CWE", "Inventory Number", "O", 0, None, "0463"),
            ("NM", "Resource Load", "O", 1, None, None),
            ("CX", "Contract Number", "O", 0, None, None),
            ("XON", "Contract Organization", "O", 0, None, None),
            ("ID", "Room Fee Indicator", "O", 1, None, "0136"),
        ),
    ),
    "CER": (
        "Certificate Detail",
        (
            ("SI", "Set ID CER", "R", 1, None, None),
            ("ST", "Serial Number", "O", 1, None, None),
            ("ST", "Version", "O", 1, None, None),
            ("XON", "Granting Authority", "O", 1, None, None),
            ("XCN", "Issuing Authority", "O", 1, None, None),
            ("ED", "Signature", "O", 1, None, None),
            ("ID", "Granting Country", "O", 1, None, "0399"),
            ("CWE", "Granting State Province", "O", 1, None, "0347"),
            ("CWE", "Granting County Parish", "O", 1, None, "0289"),
            ("CWE", "Certificate Type", "O", 1, None, None),
            ("CWE", "Certificate Domain", "O", 1, None, None),
            ("EI", "Subject ID", "O", 1, None, None),
            ("ST", "Subject Name", "R", 1, None, None),
            ("CWE", "Subject Directory Attribute Extension", "O", 0, None, None),
            ("CWE", "Subject Public Key Info", "O", 1, None, None),
            ("CWE", "Authority Key Identifier", "O", 1, None, None),
            ("ID", "Basic Constraint", "O", 1, None, "0136"),
            ("CWE", "Crl Distribution Point", "O", 0, None, None),
            ("ID", "Jurisdiction Country", "O", 1, None, "0399"),
            ("CWE", "Jurisdiction State Province", "O", 1, None, "0347"),
            ("CWE", "Jurisdiction County Parish", "O", 1, None, "0289"),
            ("CWE", "Jurisdiction Breadth", "O", 0, None, "0547"),
            ("DTM", "Granting Date", "O", 1, None, None),
            ("DTM", "Issuing Date", "O", 1, None, None),
            ("DTM", "Activation Date", "O", 1, None, None),
            ("DTM", "Inactivation Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("DTM", "Renewal Date", "O", 1, None, None),
            ("DTM", "Revocation Date", "O", 1, None, None),
            ("CWE", "Revocation Reason Code", "O", 1, None, None),
            ("CWE", "Certificate Status Code", "O", 1, None, "0536"),
        ),
    ),
    "CM0": (
        "Clinical Study Master",
        (
            ("SI", "Set ID CM0", "O", 1, None, None),
            ("EI", "Sponsor Study ID", "R", 1, None, None),
            ("EI", "Alternate Study ID", "O", 3, None, None),
            ("ST", "Title Of Study", "R", 1, None, None),
            ("XCN", "Chairman Of Study", "O", 0, None, None),
            ("DT", "Last Irb Approval Date", "O", 1, None, None),
            ("NM", "Total Accrual To Date", "O", 1, None, None),
            ("DT", "Last Accrual Date", "O", 1, None, None),
            ("XCN", "Contact For Study", "O", 0, None, None),
            ("XTN", "Contact S Telephone Number", "O", 1, None, None),
            ("XAD", "Contact S Address", "O", 0, None, None),
        ),
    ),
    "CM1": (
        "Clinical Study Phase Master",
        (
            ("SI", "Set ID CM1", "R", 1, None, None),
            ("CWE", "Study Phase Identifier", "R", 1, None, "9999"),
            ("ST", "Description Of Study Phase", "R", 1, None, None),
        ),
    ),
    "CM2": (
        "Clinical Study Schedule Master",
        (
            ("SI", "Set ID CM2", "O", 1, None, None),
            ("CWE", "Scheduled Time Point", "R", 1, None, None),
            ("ST", "Description Of Time Point", "O", 1, None, None),
            ("CWE", "Events Scheduled This Time Point", "R", 200, None, None),
        ),
    ),
    "CNS": (
        "Clear Notification",
        (
            ("NM", "Starting Notification Reference Number", "O", 1, None, None),
            ("NM", "Ending Notification Reference Number", "O", 1, None, None),
            ("DTM", "Starting Notification Date Time", "O", 1, None, None),
            ("DTM", "Ending Notification Date Time", "O", 1, None, None),
            ("CWE", "Starting Notification Code", "O", 1, None, "9999"),
            ("CWE", "Ending Notification Code", "O", 1, None, "9999"),
        ),
    ),
    "CON": (
        "Consent Segment",
        (
            ("SI", "Set ID CON", "R", 1, None, None),
            ("CWE", "Consent Type", "O", 1, None, "0496"),
            ("ST", "Consent Form ID And Version", "O", 1, None, None),
            ("EI", "Consent Form Number", "O", 1, None, None),
            ("FT", "Consent Text", "O", 0, None, None),
            ("FT", "Subject Specific Consent Text", "O", 0, None, None),
            ("FT", "Consent Background Information", "O", 0, None, None),
            ("FT", "Subject Specific Consent Background Text", "O", 0, None, None),
            ("FT", "Consenter Imposed Limitations", "O", 0, None, None),
            ("CNE", "Consent Mode", "O", 1, None, "0497"),
            ("CNE", "Consent Status", "R", 1, None, "0498"),
            ("DTM", "Consent Discussion Date Time", "O", 1, None, None),
            ("DTM", "Consent Decision Date Time", "O", 1, None, None),
            ("DTM", "Consent Effective Date Time", "O", 1, None, None),
            ("DTM", "Consent End Date Time", "O", 1, None, None),
            ("ID", "Subject Competence Indicator", "O", 1, None, "0136"),
            ("ID", "Translator Assistance Indicator", "O", 1, None, "0136"),
            ("CWE", "Language Translated To", "O", 1, None, "0296"),
            ("ID", "Informational Material Supplied Indicator", "O", 1, None, "0136"),
            ("CWE", "Consent Bypass Reason", "O", 1, None, "0499"),
            ("ID", "Consent Disclosure Level", "O", 1, None, "0500"),
            ("CWE", "Consent Non Disclosure Reason", "O", 1, None, "0501"),
            ("CWE", "Non Subject Consenter Reason", "O", 1, None, "0502"),
            ("XPN", "Consenter ID", "R", 0, None, None),
            ("CWE", "Relationship To Subject", "R", 0, None, "0548"),
        ),
    ),
    "CSP": (
        "Clinical Study Phase",
        (
            ("CWE", "Study Phase Identifier", "R", 1, None, "9999"),
            ("DTM", "Date Time Study Phase Began", "R", 1, None, None),
            ("DTM", "Date Time Study Phase Ended", "O", 1, None, None),
            ("CWE", "Study Phase Evaluability", "O", 1, None, "9999"),
        ),
    ),
    "CSR": (
        "Clinical Study Registration",
        (
            ("EI", "Sponsor Study ID", "R", 1, None, None),
            ("EI", "Alternate Study ID", "O", 1, None, None),
            ("CWE", "Institution Registering The Patient", "O", 1, None, "9999"),
            ("CX", "Sponsor Patient ID", "R", 1, None, None),
            ("CX", "Alternate Patient ID CSR", "O", 1, None, None),
            ("DTM", "Date Time Of Patient Study Registration", "R", 1, None, None),
            ("XCN", "Person Performing Study Registration", "O", 0, None, None),
            ("XCN", "Study Authorizing Provider", "R", 0, None, None),
            ("DTM", "Date Time Patient Study Consent Signed", "O", 1, None, None),
            ("CWE", "Patient Study Eligibility Status", "O", 1, None, "9999"),
            ("DTM", "Study Randomization Date Time", "O", 3, None, None),
            ("CWE", "Randomized Study Arm", "O", 3, None, "9999"),
            ("CWE", "Stratum For Study Randomization", "O", 3, None, "9999"),
            ("CWE", "Patient Evaluability Status", "O", 1, None, "9999"),
            ("DTM", "Date Time Ended Study", "O", 1, None, None),
            ("CWE", "Reason Ended Study", "O", 1, None, "9999"),
        ),
    ),
    "CSS": (
        "Clinical Study Data Schedule Segment",
        (
            ("CWE", "Study Scheduled Time Point", "R", 1, None, "9999"),
            ("DTM", "Study Scheduled Patient Time Point", "O", 1, None, None),
            ("CWE", "Study Quality Control Codes", "O", 3, None, "9999"),
        ),
    ),
    "CTD": (
        "Contact Data",
        (
            ("CWE", "Contact Role", "R", 0, 250, "0131"),
            ("XPN", "Contact Name", "O", 0, 250, None),
            ("XAD", "Contact Address", "O", 0, 250, None),
            ("PL", "Contact Location", "O", 1, 60, None),
            ("XTN", "Contact Communication Information", "O", 0, 250, None),
            ("CWE", "Preferred Method of Contact", "O", 1, 250, "0185"),
            ("PLN", "Contact Identifiers", "O", 0, 100, "0338"),
        ),
    ),
    "CTI": (
        "Clinical Trial Identification",
        (
            ("EI", "Sponsor Study ID", "R", 1, 60, None),
            ("CWE", "Study Phase Identifier", "O", 1, 250, "9999"),
            ("CWE", "Study Scheduled Time Point", "O", 1, 250, "9999"),
        ),
    ),
    "DB1": (
        "Disability",
        (
            ("SI", "Set ID - DB1", "R", 1, 4, None),
            ("CWE", "Disabled Person Code", "O", 1, None, "0334"),
            ("CX", "Disabled Person Identifier", "O", 0, 250, None),
            ("ID", "Disabled Indicator", "O", 1, 1, "0136"),
            ("DT", "Disability Start Date", "O", 1, 8, None),
            ("DT", "Disability End Date", "O", 1, 8, None),
            ("DT", "Disability Return to Work Date", "O", 1, 8, None),
            ("DT", "Disability Unable to Work Date", "O", 1, 8, None),
        ),
    ),
    "DG1": (
        "Diagnosis",
        (
            ("SI", "Set ID - DG1", "R", 1, 4, None),
            ("WD", "Diagnosis Coding Method", "B", 1, None, None),
            ("CWE", "Diagnosis Code - DG1", "R", 1, 250, "0051"),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("DTM", "Diagnosis Date/Time", "O", 1, 26, None),
            ("CWE", "Diagnosis Type", "R", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("WD", "Diagnosis Description", "B", 1, None, None),
            ("NM", "Diagnosis Priority", "O", 1, None, "0359"),
            ("XCN", "Diagnosing Clinician", "O", 0, 250, None),
            ("CWE", "Diagnosis Classification", "O", 1, None, "0228"),
            ("ID", "Confidential Indicator", "O", 1, 1, "0136"),
            ("DTM", "Attestation Date/Time", "O", 1, 26, None),
            ("EI", "Diagnosis Identifier", "O", 1, 427, None),
            ("ID", "Diagnosis Action Code", "O", 1, 1, "0206"),
            ("EI", "Parent Diagnosis", "O", 1, None, None),
            ("CWE", "DRG Ccl Value Code", "O", 1, None, "0728"),
            ("ID", "DRG Grouping Usage", "O", 1, None, "0136"),
            ("CWE", "DRG Diagnosis Determination Status", "O", 1, None, "0731"),
            ("CWE", "Present On Admission Poa Indicator", "O", 1, None, "0895"),
        ),
    ),
    "DMI": (
        "DRG Master File Information",
        (
            ("CNE", "Diagnostic Related Group", "O", 1, None, "0055"),
            ("CNE", "Major Diagnostic Category", "O", 1, None, "0118"),
            ("NR", "Lower And Upper Trim Points", "O", 1, None, None),
            ("NM", "Average Length Of Stay", "O", 1, None, None),
            ("NM", "Relative Weight", "O", 1, None, None),
        ),
    ),
    "DRG": (
        "Diagnosis Related Group",
        (
            ("CNE", "Diagnostic Related Group", "O", 1, None, "0055"),
            ("DTM", "DRG Assigned Date/Time", "O", 1, 26, None),
            ("ID", "DRG Approval Indicator", "O", 1, 1, "0136"),
            ("CWE", "DRG Grouper Review Code", "O", 1, None, "0056"),
            ("CWE", "Outlier Type", "O", 1, 250, "0083"),
            ("NM", "Outlier Days", "O", 1, 3, None),
            ("CP", "Outlier Cost", "O", 1, 12, None),
            ("CWE", "DRG Payor", "O", 1, None, "0229"),
            ("CP", "Outlier Reimbursement", "O", 1, 9, None),
            ("ID", "Confidential Indicator", "O", 1, 1, "0136"),
            ("CWE", "DRG Transfer Type", "O", 1, None, "0415"),
            ("XPN", "Name Of Coder", "O", 1, None, None),
            ("CWE", "Grouper Status", "O", 1, None, "0734"),
            ("CWE", "Pccl Value Code", "O", 1, None, "0728"),
            ("NM", "Effective Weight", "O", 1, None, None),
            ("MO", "Monetary Amount", "O", 1, None, None),
            ("CWE", "Status Patient", "O", 1, None, "0739"),
            ("ST", "Grouper Software Name", "O", 1, None, None),
            ("ST", "Grouper Software Version", "O", 1, None, None),
            ("CWE", "Status Financial Calculation", "O", 1, None, "0742"),
            ("MO", "Relative Discount Surcharge", "O", 1, None, None),
            ("MO", "Basic Charge", "O", 1, None, None),
            ("MO", "Total Charge", "O", 1, None, None),
            ("MO", "Discount Surcharge", "O", 1, None, None),
            ("NM", "Calculated Days", "O", 1, None, None),
            ("CWE", "Status Gender", "O", 1, None, "0749"),
            ("CWE", "Status Age", "O", 1, None, "0749"),
            ("CWE", "Status Length Of Stay", "O", 1, None, "0749"),
            ("CWE", "Status Same Day Flag", "O", 1, None, "0749"),
            ("CWE", "Status Separation Mode", "O", 1, None, "0749"),
            ("CWE", "Status Weight At Birth", "O", 1, None, "0755"),
            ("CWE", "Status Respiration Minutes", "O", 1, None, "0757"),
            ("CWE", "Status Admission", "O", 1, None, "0759"),
        ),
    ),
    "DSC": (
        "Continuation Pointer",
        (
            ("ST", "Continuation Pointer", "O", 1, 180, None),
            ("ID", "Continuation Style", "O", 1, 1, "0398"),
        ),
    ),
    "DSP": (
        "Display Data",
        (
            ("SI", "Set ID DSP", "O", 1, None, None),
            ("SI", "Display Level", "O", 1, None, None),
            ("TX", "Data Line", "R", 1, None, None),
            ("ST", "Logical Break Point", "O", 1, None, None),
            ("TX", "Result ID", "O", 1, None, None),
        ),
    ),
    "ECD": (
        "Equipment Command",
        (
            ("NM", "Reference Command Number", "R", 1, None, None),
            ("CWE", "Remote Control Command", "R", 1, None, "0368"),
            ("ID", "Response Required", "O", 1, None, "0136"),
            ("WD", "Requested Completion Time", "B", 1, None, None),
            ("TX", "Parameters", "O", 0, None, None),
        ),
    ),
    "ECR": (
        "Equipment Command Response",
        (
            ("CWE", "Command Response", "R", 1, None, "0387"),
            ("DTM", "Date Time Completed", "R", 1, None, None),
            ("TX", "Command Response Parameters", "O", 0, None, None),
        ),
    ),
    "EDU": (
        "Educational Detail",
        (
            ("SI", "Set ID EDU", "R", 1, None, None),
            ("CWE", "Academic Degree", "O", 1, None, "0360"),
            ("DR", "Academic Degree Program Date Range", "O", 1, None, None),
            (
                "DR",
                "Academic Degree Program Participation Date Range",
                "O",
                1,
                None,
                None,
            ),
            ("DT", "Academic Degree Granted Date", "O", 1, None, None),
            ("XON", "School", "O", 1, None, None),
            ("CWE", "School Type Code", "O", 1, None, "0402"),
            ("XAD", "School Address", "O", 1, None, None),
            ("CWE", "Major Field Of Study", "O", 0, None, None),
        ),
    ),
    "EQP": (
        "Equipment/log Service",
        (
            ("CWE", "Event Type", "R", 1, None, "0450"),
            ("ST", "File Name", "O", 1, None, None),
            ("DTM", "Start Date Time", "R", 1, None, None),
            ("DTM", "End Date Time", "O", 1, None, None),
            ("FT", "Transaction Data", "R", 1, None, None),
        ),
    ),
    "EQU": (
        "Equipment Detail",
        (
            ("EI", "Equipment Instance Identifier", "R", 1, None, None),
            ("DTM", "Event Date Time", "R", 1, None, None),
            ("CWE", "Equipment State", "O", 1, None, "0365"),
            ("CWE", "Local Remote Control State", "O", 1, None, "0366"),
            ("CWE", "Alert Level", "O", 1, None, "0367"),
        ),
    ),
    "ERR": (
        "Error",
        (
            ("WD", "Error Code And Location", "B", 1, None, None),
            ("ERL", "Error Location", "O", 0, 18, None),
            ("CWE", "HL7 Error Code", "R", 1, 705, "0357"),
            ("ID", "Severity", "R", 1, 2, "0516"),
            ("CWE", "Application Error Code", "O", 1, 705, "0533"),
            ("ST", "Application Error Parameter", "O", 10, 80, None),
            ("TX", "Diagnostic Information", "O", 1, 2048, None),
            ("TX", "User Message", "O", 1, 250, None),
            ("CWE", "Inform Person Indicator", "O", 0, None, "0517"),
            ("CWE", "Override Type", "O", 1, 705, "0518"),
            ("CWE", "Override Reason Code", "O", 0, 705, "0519"),
            ("XTN", "Help Desk Contact Point", "O", 0, 652, None),
        ),
    ),
    "EVN": (
        "Event Type",
        (
            ("WD", "Event Type Code", "B", 1, None, None),
            ("DTM", "Recorded Date/Time", "R", 1, 26, None),
            ("DTM", "Date/Time Planned Event", "O", 1, 26, None),
            ("CWE", "Event Reason Code", "O", 1, None, "0062"),
            ("XCN", "Operator ID", "O", 0, 250, "0188"),
            ("DTM", "Event Occurred", "O", 1, 26, None),
            ("HD", "Event Facility", "O", 1, 241, None),
        ),
    ),
    "FAC": (
        "Facility",
        (
            ("EI", "Facility ID FAC", "R", 1, None, None),
            ("ID", "Facility Type", "O", 1, None, "0331"),
            ("XAD", "Facility Address", "R", 0, None, None),
            ("XTN", "Facility Telecommunication", "R", 1, None, None),
            ("XCN", "Contact Person", "O", 0, None, None),
            ("ST", "Contact Title", "O", 0, None, None),
            ("XAD", "Contact Address", "O", 0, None, None),
            ("XTN", "Contact Telecommunication", "O", 0, None, None),
            ("XCN", "Signature Authority", "R", 0, None, None),
            ("ST", "Signature Authority Title", "O", 1, None, None),
            ("XAD", "Signature Authority Address", "O", 0, None, None),
            ("XTN", "Signature Authority Telecommunication", "O", 1, None, None),
        ),
    ),
    "FHS": (
        "File Header",
        (
            ("ST", "File Field Separator", "R", 1, None, None),
            ("ST", "File Encoding Characters", "R", 1, None, None),
            ("HD", "File Sending Application", "O", 1, None, None),
            ("HD", "File Sending Facility", "O", 1, None, None),
            ("HD", "File Receiving Application", "O", 1, None, None),
            ("HD", "File Receiving Facility", "O", 1, None, None),
            ("DTM", "File Creation Date Time", "O", 1, None, None),
            ("ST", "File Security", "O", 1, None, None),
            ("ST", "File Name ID", "O", 1, None, None),
            ("ST", "File Header Comment", "O", 1, None, None),
            ("ST", "File Control ID", "O", 1, None, None),
            ("ST", "Reference File Control ID", "O", 1, None, None),
            ("HD", "File Sending Network Address", "O", 1, None, None),
            ("HD", "File Receiving Network Address", "O", 1, None, None),
        ),
    ),
    "FT1": (
        "Financial Transaction",
        (
            ("SI", "Set ID - FT1", "O", 1, 4, None),
            ("ST", "Transaction ID", "O", 1, 12, None),
            ("ST", "Transaction Batch ID", "O", 1, 10, None),
            ("DR", "Transaction Date", "R", 1, 53, None),
            ("DTM", "Transaction Posting Date", "O", 1, 26, None),
            ("CWE", "Transaction Type", "R", 1, None, "0017"),
            ("CWE", "Transaction Code", "R", 1, 250, "0132"),
            ("WD", "Transaction Description", "B", 1, None, None),
            ("WD", "Transaction Description Alt", "B", 1, None, None),
            ("NM", "Transaction Quantity", "O", 1, 6, None),
            ("CP", "Transaction Amount - Extended", "O", 1, 12, None),
            ("CP", "Transaction amount - unit", "O", 1, 12, None),
            ("CWE", "Department Code", "O", 1, 250, "0049"),
            ("CWE", "Insurance Plan ID", "O", 1, 250, "0072"),
            ("CP", "Insurance Amount", "O", 1, 12, None),
            ("PL", "Assigned Patient Location", "O", 1, 80, None),
            ("CWE", "Fee Schedule", "O", 1, None, "0024"),
            ("CWE", "Patient Type", "O", 1, None, "0018"),
            ("CWE", "Diagnosis Code - FT1", "O", 0, 250, "0051"),
            ("XCN", "Performed By Code", "O", 0, 250, "0084"),
            ("XCN", "Ordered By Code", "O", 0, 250, None),
            ("CP", "Unit Cost", "O", 1, 12, None),
            ("EI", "Filler Order Number", "O", 1, 427, None),
            ("XCN", "Entered By Code", "O", 0, 250, None),
            ("CNE", "Procedure Code", "O", 1, None, "0088"),
            ("CNE", "Procedure Code Modifier", "O", 0, None, "0340"),
            ("CWE", "Advanced Beneficiary Notice Code", "O", 1, 250, "0339"),
            (
                "CWE",
                "Medically Necessary Duplicate Procedure Reason",
                "O",
                1,
                250,
                "0476",
            ),
            ("CWE", "NDC Code", "O", 1, None, "0549"),
            ("CX", "Payment Reference ID", "O", 1, 250, None),
            ("SI", "Transaction Reference Key", "O", 0, 4, None),
            ("XON", "Performing Facility", "O", 0, None, None),
            ("XON", "Ordering Facility", "O", 1, None, None),
            ("CWE", "Item Number", "O", 1, None, None),
            ("ST", "Model Number", "O", 1, None, None),
            ("CWE", "Special Processing Code", "O", 0, None, None),
            ("CWE", "Clinic Code", "O", 1, None, None),
            ("CX", "Referral Number", "O", 1, None, None),
            ("CX", "Authorization Number", "O", 1, None, None),
            ("CWE", "Service Provider Taxonomy Code", "O", 1, None, None),
            ("CWE", "Revenue Code", "O", 1, None, "0456"),
            ("ST", "Prescription Number", "O", 1, None, None),
            ("CQ", "NDC Qty And Uom", "O", 1, None, None),
        ),
    ),
    "FTS": (
        "File Trailer",
        (
            ("NM", "File Batch Count", "O", 1, None, None),
            ("ST", "File Trailer Comment", "O", 1, None, None),
        ),
    ),
    "GOL": (
        "Goal Detail",
        (
            ("ID", "Action Code", "R", 1, None, "0287"),
            ("DTM", "Action Date Time", "R", 1, None, None),
            ("CWE", "Goal ID", "R", 1, None, None),
            ("EI", "Goal Instance ID", "R", 1, None, None),
            ("EI", "Episode Of Care ID", "O", 1, None, None),
            ("NM", "Goal List Priority", "O", 1, None, None),
            ("DTM", "Goal Established Date Time", "O", 1, None, None),
            ("DTM", "Expected Goal Achieve Date Time", "O", 1, None, None),
            ("CWE", "Goal Classification", "O", 1, None, None),
            ("CWE", "Goal Management Discipline", "O", 1, None, None),
            ("CWE", "Current Goal Review Status", "O", 1, None, None),
            ("DTM", "Current Goal Review Date Time", "O", 1, None, None),
            ("DTM", "Next Goal Review Date Time", "O", 1, None, None),
            ("DTM", "Previous Goal Review Date Time", "O", 1, None, None),
            ("WD", "Goal Review Interval", "B", 1, None, None),
            ("CWE", "Goal Evaluation", "O", 1, None, None),
            ("ST", "Goal Evaluation Comment", "O", 0, None, None),
            ("CWE", "Goal Life Cycle Status", "O", 1, None, None),
            ("DTM", "Goal Life Cycle Status Date Time", "O", 1, None, None),
            ("CWE", "Goal Target Type", "O", 0, None, None),
            ("XPN", "Goal Target Name", "O", 0, None, None),
            ("CNE", "Mood Code", "O", 1, None, "0725"),
        ),
    ),
    "GP1": (
        "Grouping/Reimbursement - Visit",
        (
            ("CWE", "Type Of Bill Code", "R", 1, None, "0455"),
            ("CWE", "Revenue Code", "O", 0, None, "0456"),
            ("CWE", "Overall Claim Disposition Code", "O", 1, None, "0457"),
            ("CWE", "Oce Edits Per Visit Code", "O", 0, None, "0458"),
            ("CP", "Outlier Cost", "O", 1, None, None),
        ),
    ),
    "GP2": (
        "Grouping/Reimbursement - Procedure Line Item",
        (
            ("CWE", "Revenue Code", "O", 1, None, "0456"),
            ("NM", "Number Of Service Units", "O", 1, None, None),
            ("CP", "Charge", "O", 1, None, None),
            ("CWE", "Reimbursement Action Code", "O", 1, None, "0459"),
            ("CWE", "Denial Or Rejection Code", "O", 1, None, "0460"),
            ("CWE", "Oce Edit Code", "O", 0, None, "0458"),
            ("CWE", "Ambulatory Payment Classification Code", "O", 1, None, "0466"),
            ("CWE", "Modifier Edit Code", "O", 0, None, "0467"),
            ("CWE", "Payment Adjustment Code", "O", 1, None, "0468"),
            ("CWE", "Packaging Status Code", "O", 1, None, "0469"),
            ("CP", "Expected Cms Payment Amount", "O", 1, None, None),
            ("CWE", "Reimbursement Type Code", "O", 1, None, "0470"),
            ("CP", "Co Pay Amount", "O", 1, None, None),
            ("NM", "Pay Rate Per Service Unit", "O", 1, None, None),
        ),
    ),
    "GT1": (
        "Guarantor",
        (
            ("SI", "Set ID - GT1", "R", 1, 4, None),
            ("CX", "Guarantor Number", "O", 0, 250, None),
            ("XPN", "Guarantor Name", "R", 0, 250, None),
            ("XPN", "Guarantor Spouse Name", "O", 0, 250, None),
            ("XAD", "Guarantor Address", "O", 0, 250, None),
            ("XTN", "Guarantor Ph Num - Home", "O", 0, 250, None),
            ("XTN", "Guarantor Ph Num - Business", "O", 0, 250, None),
            ("DTM", "Guarantor Date/Time Of Birth", "O", 1, 26, None),
            ("CWE", "Guarantor Administrative Sex", "O", 1, None, "0001"),
            ("CWE", "Guarantor Type", "O", 1, None, "0068"),
            ("CWE", "Guarantor Relationship", "O", 1, 250, "0063"),
            ("ST", "Guarantor SSN", "O", 1, 11, None),
            ("DT", "Guarantor Date - Begin", "O", 1, 8, None),
            ("DT", "Guarantor Date - End", "O", 1, 8, None),
            ("NM", "Guarantor Priority", "O", 1, 2, None),
            ("XPN", "Guarantor Employer Name", "O", 0, 250, None),
            ("XAD", "Guarantor Employer Address", "O", 0, 250, None),
            ("XTN", "Guarantor Employer Phone Number", "O", 0, 250, None),
            ("CX", "Guarantor Employee ID Number", "O", 0, 250, None),
            ("CWE", "Guarantor Employment Status", "O", 1, None, "0066"),
            ("XON", "Guarantor Organization Name", "O", 0, 250, None),
            ("ID", "Guarantor Billing Hold Flag", "O", 1, 1, "0136"),
            ("CWE", "Guarantor Credit Rating Code", "O", 1, 250, "0341"),
            ("DTM", "Guarantor Death Date And Time", "O", 1, 26, None),
            ("ID", "Guarantor Death Flag", "O", 1, 1, "0136"),
            ("CWE", "Guarantor Charge Adjustment Code", "O", 1, 250, "0218"),
            ("CP", "Guarantor Household Annual Income", "O", 1, 10, None),
            ("NM", "Guarantor Household Size", "O", 1, 3, None),
            ("CX", "Guarantor Employer ID Number", "O", 0, 250, None),
            ("CWE", "Guarantor Marital Status Code", "O", 1, 250, "0002"),
            ("DT", "Guarantor Hire Effective Date", "O", 1, 8, None),
            ("DT", "Employment Stop Date", "O", 1, 8, None),
            ("CWE", "Living Dependency", "O", 1, None, "0223"),
            ("CWE", "Ambulatory Status", "O", 0, None, "0009"),
            ("CWE", "Citizenship", "O", 0, 250, "0171"),
            ("CWE", "Primary Language", "O", 1, 250, "0296"),
            ("CWE", "Living Arrangement", "O", 1, None, "0220"),
            ("CWE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("CWE", "Student Indicator", "O", 1, None, "0231"),
            ("CWE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CWE", "Nationality", "O", 1, 250, "0212"),
            ("CWE", "Ethnic Group", "O", 0, 250, "0189"),
            ("XPN", "Contact Person's Name", "O", 0, 250, "0200"),
            ("XTN", "Contact Person's Telephone Number", "O", 0, 250, None),
            ("CWE", "Contact Reason", "O", 1, 250, "0222"),
            ("CWE", "Contact Relationship", "O", 1, None, "0063"),
            ("ST", "Job Title", "O", 1, 20, None),
            ("JCC", "Job Code/Class", "O", 1, 20, "0327"),
            ("XON", "Guarantor Employer's Organization Name", "O", 0, 250, None),
            ("CWE", "Handicap", "O", 1, None, "0295"),
            ("CWE", "Job Status", "O", 1, None, "0311"),
            ("FC", "Guarantor Financial Class", "O", 1, 50, None),
            ("CWE", "Guarantor Race", "O", 0, 250, "0005"),
            ("ST", "Guarantor Birth Place", "O", 1, 250, None),
            ("CWE", "Vip Indicator", "O", 1, None, "0099"),
        ),
    ),
    "IAM": (
        "Patient Adverse Reaction Information",
        (
            ("SI", "Set ID IAM", "R", 1, None, None),
            ("CWE", "Allergen Type Code", "O", 1, None, "0127"),
            ("CWE", "Allergen Code Mnemonic Description", "R", 1, None, None),
            ("CWE", "Allergy Severity Code", "O", 1, None, "0128"),
            ("ST", "Allergy Reaction Code", "O", 0, None, None),
            ("CNE", "Allergy Action Code", "R", 1, None, "0206"),
            ("EI", "Allergy Unique Identifier", "O", 1, None, None),
            ("ST", "Action Reason", "O", 1, None, None),
            ("CWE", "Sensitivity To Causative Agent Code", "O", 1, None, "0436"),
            ("CWE", "Allergen Group Code Mnemonic Description", "O", 1, None, None),
            ("DT", "Onset Date", "O", 1, None, None),
            ("ST", "Onset Date Text", "O", 1, None, None),
            ("DTM", "Reported Date Time", "O", 1, None, None),
            ("XPN", "Reported By", "O", 1, None, None),
            ("CWE", "Relationship To Patient Code", "O", 1, None, "0063"),
            ("CWE", "Alert Device Code", "O", 1, None, "0437"),
            ("CWE", "Allergy Clinical Status Code", "O", 1, None, "0438"),
            ("XCN", "Statused By Person", "O", 1, None, None),
            ("XON", "Statused By Organization", "O", 1, None, None),
            ("DTM", "Statused At Date Time", "O", 1, None, None),
            ("XCN", "Inactivated By Person", "O", 1, None, None),
            ("DTM", "Inactivated Date Time", "O", 1, None, None),
            ("XCN", "Initially Recorded By Person", "O", 1, None, None),
            ("DTM", "Initially Recorded Date Time", "O", 1, None, None),
            ("XCN", "Modified By Person", "O", 1, None, None),
            ("DTM", "Modified Date Time", "O", 1, None, None),
            ("CWE", "Clinician Identified Code", "O", 1, None, None),
            ("XON", "Initially Recorded By Organization", "O", 1, None, None),
            ("XON", "Modified By Organization", "O", 1, None, None),
            ("XON", "Inactivated By Organization", "O", 1, None, None),
        ),
    ),
    "IAR": (
        "Allergy Reaction",
        (
            ("CWE", "Allergy Reaction Code", "R", 1, None, None),
            ("CWE", "Allergy Severity Code", "R", 1, None, "0128"),
            ("CWE", "Sensitivity To Causative Agent Code", "O", 1, None, "0436"),
            ("ST", "Management", "O", 1, None, None),
        ),
    ),
    "IIM": (
        "Inventory Item Master",
        (
            ("CWE", "Primary Key Value IIM", "R", 1, None, None),
            ("CWE", "Service Item Code", "R", 1, None, None),
            ("ST", "Inventory Lot Number", "O", 1, None, None),
            ("DTM", "Inventory Expiration Date", "O", 1, None, None),
            ("CWE", "Inventory Manufacturer Name", "O", 1, None, None),
            ("CWE", "Inventory Location", "O", 1, None, None),
            ("DTM", "Inventory Received Date", "O", 1, None, None),
            ("NM", "Inventory Received Quantity", "O", 1, None, None),
            ("CWE", "Inventory Received Quantity Unit", "O", 1, None, None),
            ("MO", "Inventory Received Item Cost", "O", 1, None, None),
            ("DTM", "Inventory On Hand Date", "O", 1, None, None),
            ("NM", "Inventory On Hand Quantity", "O", 1, None, None),
            ("CWE", "Inventory On Hand Quantity Unit", "O", 1, None, None),
            ("CNE", "Procedure Code", "O", 1, None, "0088"),
            ("CNE", "Procedure Code Modifier", "O", 0, None, "0340"),
        ),
    ),
    "ILT": (
        "Material Lot",
        (
            ("SI", "Set ID ILT", "R", 1, None, None),
            ("ST", "Inventory Lot Number", "R", 1, None, None),
            ("DTM", "Inventory Expiration Date", "O", 1, None, None),
            ("DTM", "Inventory Received Date", "O", 1, None, None),
            ("NM", "Inventory Received Quantity", "O", 1, None, None),
            ("CWE", "Inventory Received Quantity Unit", "O", 1, None, None),
            ("MO", "Inventory Received Item Cost", "O", 1, None, None),
            ("DTM", "Inventory On Hand Date", "O", 1, None, None),
            ("NM", "Inventory On Hand Quantity", "O", 1, None, None),
            ("CWE", "Inventory On Hand Quantity Unit", "O", 1, None, None),
        ),
    ),
    "IN1": (
        "Insurance",
        (
            ("SI", "Set ID - IN1", "R", 1, 4, None),
            ("CWE", "Insurance Plan ID", "R", 1, 250, "0072"),
            ("CX", "Insurance Company ID", "R", 0, 250, None),
            ("XON", "Insurance Company Name", "O", 0, 250, None),
            ("XAD", "Insurance Company Address", "O", 0, 250, None),
            ("XPN", "Insurance Co Contact Person", "O", 0, 250, None),
            ("XTN", "Insurance Co Phone Number", "O", 0, 250, None),
            ("ST", "Group Number", "O", 1, 12, None),
            ("XON", "Group Name", "O", 0, 250, None),
            ("CX", "Insured's Group Emp ID", "O", 0, 250, None),
            ("XON", "Insured's Group Emp Name", "O", 0, 250, None),
            ("DT", "Plan Effective Date", "O", 1, 8, None),
            ("DT", "Plan Expiration Date", "O", 1, 8, None),
            ("AUI", "Authorization Information", "O", 1, 239, None),
            ("CWE", "Plan Type", "O", 1, None, "0086"),
            ("XPN", "Name Of Insured", "O", 0, 250, None),
            ("CWE", "Insured's Relationship To Patient", "O", 1, 250, "0063"),
            ("DTM", "Insured's Date Of Birth", "O", 1, 26, None),
            ("XAD", "Insured's Address", "O", 0, 250, None),
            ("CWE", "Assignment Of Benefits", "O", 1, None, "0135"),
            ("CWE", "Coordination Of Benefits", "O", 1, None, "0173"),
            ("ST", "Coord Of Ben. Priority", "O", 1, 2, None),
            ("ID", "Notice Of Admission Flag", "O", 1, 1, "0136"),
            ("DT", "Notice Of Admission Date", "O", 1, 8, None),
            ("ID", "Report Of Eligibility Flag", "O", 1, 1, "0136"),
            ("DT", "Report Of Eligibility Date", "O", 1, 8, None),
            ("CWE", "Release Information Code", "O", 1, None, "0093"),
            ("ST", "Pre-Admit Cert (PAC)", "O", 1, 15, None),
            ("DTM", "Verification Date/Time", "O", 1, 26, None),
            ("XCN", "Verification By", "O", 0, 250, None),
            ("CWE", "Type Of Agreement Code", "O", 1, None, "0098"),
            ("CWE", "Billing Status", "O", 1, None, "0022"),
            ("NM", "Lifetime Reserve Days", "O", 1, 4, None),
            ("NM", "Delay Before L.R. Day", "O", 1, 4, None),
            ("CWE", "Company Plan Code", "O", 1, None, "0042"),
            ("ST", "Policy Number", "O", 1, 15, None),
            ("CP", "Policy Deductible", "O", 1, 12, None),
            ("WD", "Policy Limit Amount", "B", 1, None, None),
            ("NM", "Policy Limit - Days", "O", 1, 4, None),
            ("WD", "Room Rate Semi Private", "B", 1, None, None),
            ("WD", "Room Rate Private", "B", 1, None, None),
            ("CWE", "Insured's Employment Status", "O", 1, 250, "0066"),
            ("CWE", "Insured S Administrative Sex", "O", 1, None, "0001"),
            ("XAD", "Insured's Employer's Address", "O", 0, 250, None),
            ("ST", "Verification Status", "O", 1, 2, None),
            ("CWE", "Prior Insurance Plan ID", "O", 1, None, "0072"),
            ("CWE", "Coverage Type", "O", 1, None, "0309"),
            ("CWE", "Handicap", "O", 1, None, "0295"),
            ("CX", "Insured's ID Number", "O", 0, 250, None),
            ("CWE", "Signature Code", "O", 1, None, "0535"),
            ("DT", "Signature Code Date", "O", 1, 8, None),
            ("ST", "Insured's Birth Place", "O", 1, 250, None),
            ("CWE", "Vip Indicator", "O", 1, None, "0099"),
            ("CX", "External Health Plan Identifiers", "O", 0, None, None),
        ),
    ),
    "IN2": (
        "Insurance Additional Information",
        (
            ("CX", "Insured's Employee ID", "O", 0, 250, None),
            ("ST", "Insured's Social Security Number", "O", 1, 11, None),
            ("XCN", "Insured's Employer's Name and ID", "O", 0, 250, None),
            ("CWE", "Employer Information Data", "O", 1, None, "0139"),
            ("CWE", "Mail Claim Party", "O", 0, None, "0137"),
            ("ST", "Medicare Health Ins Card Number", "O", 1, 15, None),
            ("XPN", "Medicaid Case Name", "O", 0, 250, None),
            ("ST", "Medicaid Case Number", "O", 1, 15, None),
            ("XPN", "Military Sponsor Name", "O", 0, 250, None),
            ("ST", "Military ID Number", "O", 1, 20, None),
            ("CWE", "Dependent Of Military Recipient", "O", 1, 250, "0342"),
            ("ST", "Military Organization", "O", 1, 25, None),
            ("ST", "Military Station", "O", 1, 25, None),
            ("CWE", "Military Service", "O", 1, None, "0140"),
            ("CWE", "Military Rank Grade", "O", 1, None, "0141"),
            ("CWE", "Military Status", "O", 1, None, "0142"),
            ("DT", "Military Retire Date", "O", 1, 8, None),
            ("ID", "Military Non-Avail Cert On File", "O", 1, 1, "0136"),
            ("ID", "Baby Coverage", "O", 1, 1, "0136"),
            ("ID", "Combine Baby Bill", "O", 1, 1, "0136"),
            ("ST", "Blood Deductible", "O", 1, 1, None),
            ("XPN", "Special Coverage Approval Name", "O", 0, 250, None),
            ("ST", "Special Coverage Approval Title", "O", 1, 30, None),
            ("CWE", "Non Covered Insurance Code", "O", 0, None, "0143"),
            ("CX", "Payor ID", "O", 0, 250, None),
            ("CX", "Payor Subscriber ID", "O", 0, 250, None),
            ("CWE", "Eligibility Source", "O", 1, None, "0144"),
            ("RMC", "Room Coverage Type/Amount", "O", 0, 82, None),
            ("PTA", "Policy Type/Amount", "O", 0, 56, None),
            ("DDI", "Daily Deductible", "O", 1, 25, None),
            ("CWE", "Living Dependency", "O", 1, None, "0223"),
            ("CWE", "Ambulatory Status", "O", 0, None, "0009"),
            ("CWE", "Citizenship", "O", 0, 250, "0171"),
            ("CWE", "Primary Language", "O", 1, 250, "0296"),
            ("CWE", "Living Arrangement", "O", 1, None, "0220"),
            ("CWE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("CWE", "Student Indicator", "O", 1, None, "0231"),
            ("CWE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CWE", "Nationality", "O", 1, 250, "0212"),
            ("CWE", "Ethnic Group", "O", 0, 250, "0189"),
            ("CWE", "Marital Status", "O", 0, 250, "0002"),
            ("DT", "Insured's Employment Start Date", "O", 1, 8, None),
            ("DT", "Employment Stop Date", "O", 1, 8, None),
            ("ST", "Job Title", "O", 1, 20, None),
            ("JCC", "Job Code/Class", "O", 1, 20, "0327"),
            ("CWE", "Job Status", "O", 1, None, "0311"),
            ("XPN", "Employer Contact Person Name", "O", 0, 250, None),
            ("XTN", "Employer Contact Person Phone Number", "O", 0, 250, None),
            ("CWE", "Employer Contact Reason", "O", 1, None, "0222"),
            ("XPN", "Insured's Contact Person's Name", "O", 0, 250, None),
            ("XTN", "Insured's Contact Person Phone Number", "O", 0, 250, None),
            ("CWE", "Insured S Contact Person Reason", "O", 0, None, "0222"),
            ("DT", "Relationship to the Patient Start Date", "O", 1, 8, None),
            ("DT", "Relationship to the Patient Stop Date", "O", 0, 8, None),
            ("CWE", "Insurance Co Contact Reason", "O", 1, None, "0232"),
            ("XTN", "Insurance Co Contact Phone Number", "O", 0, 250, None),
            ("CWE", "Policy Scope", "O", 1, None, "0312"),
            ("CWE", "Policy Source", "O", 1, None, "0313"),
            ("CX", "Patient Member Number", "O", 1, 250, None),
            ("CWE", "Guarantor's Relationship to Insured", "O", 1, 250, "0063"),
            ("XTN", "Insured's Phone Number - Home", "O", 0, 250, None),
            ("XTN", "Insured's Employer Phone Number", "O", 0, 250, None),
            ("CWE", "Military Handicapped Program", "O", 1, 250, "0343"),
            ("ID", "Suspend Flag", "O", 1, 1, "0136"),
            ("ID", "Copay Limit Flag", "O", 1, 1, "0136"),
            ("ID", "Stoploss Limit Flag", "O", 1, 1, "0136"),
            ("XON", "Insured Organization Name and ID", "O", 0, 250, None),
            ("XON", "Insured Employer Organization Name and ID", "O", 0, 250, None),
            ("CWE", "Race", "O", 0, 250, "0005"),
            ("CWE", "CMS Patient's Relationship to Insured", "O", 1, 250, "0344"),
        ),
    ),
    "IN3": (
        "Insurance Additional Information, Certification",
        (
            ("SI", "Set ID - IN3", "R", 1, 4, None),
            ("CX", "Certification Number", "O", 1, 250, None),
            ("XCN", "Certified By", "O", 0, 250, None),
            ("ID", "Certification Required", "O", 1, 1, "0136"),
            ("MOP", "Penalty", "O", 1, 23, None),
            ("DTM", "Certification Date/Time", "O", 1, 26, None),
            ("DTM", "Certification Modify Date/Time", "O", 1, 26, None),
            ("XCN", "Operator", "O", 0, 250, None),
            ("DT", "Certification Begin Date", "O", 1, 8, None),
            ("DT", "Certification End Date", "O", 1, 8, None),
            ("DTN", "Days", "O", 1, 6, None),
            ("CWE", "Non-Concur Code/Description", "O", 1, 250, "0233"),
            ("DTM", "Non-Concur Effective Date/Time", "O", 1, 26, None),
            ("XCN", "Physician Reviewer", "O", 0, 250, "0010"),
            ("ST", "Certification Contact", "O", 1, 48, None),
            ("XTN", "Certification Contact Phone Number", "O", 0, 250, None),
            ("CWE", "Appeal Reason", "O", 1, 250, "0345"),
            ("CWE", "Certification Agency", "O", 1, 250, "0346"),
            ("XTN", "Certification Agency Phone Number", "O", 0, 250, None),
            ("ICD", "Pre-Certification Requirement", "O", 0, 40, None),
            ("ST", "Case Manager", "O", 1, 48, None),
            ("DT", "Second Opinion Date", "O", 1, 8, None),
            ("CWE", "Second Opinion Status", "O", 1, None, "0151"),
            ("CWE", "Second Opinion Documentation Received", "O", 0, None, "0152"),
            ("XCN", "Second Opinion Physician", "O", 0, 250, "0010"),
        ),
    ),
    "INV": (
        "Inventory Detail",
        (
            ("CWE", "Substance Identifier", "R", 1, None, "0451"),
            ("CWE", "Substance Status", "R", 0, None, "0383"),
            ("CWE", "Substance Type", "O", 1, None, "0384"),
            ("CWE", "Inventory Container Identifier", "O", 1, None, "9999"),
            ("CWE", "Container Carrier Identifier", "O", 1, None, "9999"),
            ("CWE", "Position On Carrier", "O", 1, None, "9999"),
            ("NM", "Initial Quantity", "O", 1, None, None),
            ("NM", "Current Quantity", "O", 1, None, None),
            ("NM", "Available Quantity", "O", 1, None, None),
            ("NM", "Consumption Quantity", "O", 1, None, None),
            ("CWE", "Quantity Units", "O", 1, None, "9999"),
            ("DTM", "Expiration Date Time", "O", 1, None, None),
            ("DTM", "First Used Date Time", "O", 1, None, None),
            ("WD", "Test Fluid Identifiers", "B", 1, None, None),
            ("CWE", "Test Fluid Identifier S", "O", 0, None, "9999"),
            ("ST", "Manufacturer Lot Number", "O", 1, None, None),
            ("CWE", "Manufacturer Identifier", "O", 1, None, "0385"),
            ("CWE", "Supplier Identifier", "O", 1, None, "0386"),
            ("CQ", "On Board Stability Time", "O", 1, None, None),
            ("CQ", "Target Value", "O", 1, None, None),
        ),
    ),
    "IPC": (
        "Imaging Procedure Control Segment",
        (
            ("EI", "Accession Identifier", "R", 1, None, None),
            ("EI", "Requested Procedure ID", "R", 1, None, None),
            ("EI", "Study Instance UID", "R", 1, None, None),
            ("EI", "Scheduled Procedure Step ID", "R", 1, None, None),
            ("CWE", "Modality", "O", 1, None, "9999"),
            ("CWE", "Protocol Code", "O", 0, None, "9999"),
            ("EI", "Scheduled Station Name", "O", 1, None, None),
            ("CWE", "Scheduled Procedure Step Location", "O", 0, None, "9999"),
            ("ST", "Scheduled Station Ae Title", "O", 1, None, None),
        ),
    ),
    "IPR": (
        "Invoice Processing Results",
        (
            ("EI", "Ipr Identifier", "R", 1, None, None),
            ("EI", "Provider Cross Reference Identifier", "R", 1, None, None),
            ("EI", "Payer Cross Reference Identifier", "R", 1, None, None),
            ("CWE", "Ipr Status", "R", 1, None, "0571"),
            ("DTM", "Ipr Date Time", "R", 1, None, None),
            ("CP", "Adjudicated Paid Amount", "O", 1, None, None),
            ("DTM", "Expected Payment Date Time", "O", 1, None, None),
            ("ST", "Ipr Checksum", "R", 1, None, None),
        ),
    ),
    "ISD": (
        "Interaction Status Detail",
        (
            ("NM", "Reference Interaction Number", "R", 1, None, None),
            ("CWE", "Interaction Type Identifier", "O", 1, None, "0368"),
            ("CWE", "Interaction Active State", "R", 1, None, "0387"),
        ),
    ),
    "ITM": (
        "Material Item",
        (
            ("EI", "Item Identifier", "R", 1, None, None),
            ("ST", "Item Description", "O", 1, None, None),
            ("CWE", "Item Status", "O", 1, None, "0776"),
            ("CWE", "Item Type", "O", 1, None, "0778"),
            ("CWE", "Item Category", "O", 1, None, None),
            ("CNE", "Subject To Expiration Indicator", "O", 1, None, "0532"),
            ("EI", "Manufacturer Identifier", "O", 1, None, None),
            ("ST", "Manufacturer Name", "O", 1, None, None),
            ("ST", "Manufacturer Catalog Number", "O", 1, None, None),
            ("CWE", "Manufacturer Labeler Identification Code", "O", 1, None, None),
            ("CNE", "Patient Chargeable Indicator", "O", 1, None, "0532"),
            ("CWE", "Transaction Code", "O", 1, None, "0132"),
            ("CP", "Transaction Amount Unit", "O", 1, None, None),
            ("CNE", "Stocked Item Indicator", "O", 1, None, "0532"),
            ("CWE", "Supply Risk Codes", "O", 1, None, "0871"),
            ("XON", "Approving Regulatory Agency", "O", 0, None, "0790"),
            ("CNE", "Latex Indicator", "O", 1, None, "0532"),
            ("CWE", "Ruling Act", "O", 0, None, "0793"),
            ("CWE", "Item Natural Account Code", "O", 1, None, "0320"),
            ("NM", "Approved To Buy Quantity", "O", 1, None, None),
            ("MO", "Approved To Buy Price", "O", 1, None, None),
            ("CNE", "Taxable Item Indicator", "O", 1, None, "0532"),
            ("CNE", "Freight Charge Indicator", "O", 1, None, "0532"),
            ("CNE", "Item Set Indicator", "O", 1, None, "0532"),
            ("EI", "Item Set Identifier", "O", 1, None, None),
            ("CNE", "Track Department Usage Indicator", "O", 1, None, "0532"),
            ("CNE", "Procedure Code", "O", 1, None, "0088"),
            ("CNE", "Procedure Code Modifier", "O", 0, None, "0340"),
            ("CWE", "Special Handling Code", "O", 1, None, "0376"),
        ),
    ),
    "IVC": (
        "Invoice Segment",
        (
            ("EI", "Provider Invoice Number", "R", 1, None, None),
            ("EI", "Payer Invoice Number", "O", 1, None, None),
            ("EI", "Contract Agreement Number", "O", 1, None, None),
            ("CWE", "Invoice Control", "R", 1, None, "0553"),
            ("CWE", "Invoice Reason", "R", 1, None, "0554"),
            ("CWE", "Invoice Type", "R", 1, None, "0555"),
            ("DTM", "Invoice Date Time", "R", 1, None, None),
            ("CP", "Invoice Amount", "R", 1, None, None),
            ("ST", "Payment Terms", "O", 1, None, None),
            ("XON", "Provider Organization", "R", 1, None, None),
            ("XON", "Payer Organization", "R", 1, None, None),
            ("XCN", "Attention", "O", 1, None, None),
            ("ID", "Last Invoice Indicator", "O", 1, None, "0136"),
            ("DTM", "Invoice Booking Period", "O", 1, None, None),
            ("ST", "Origin", "O", 1, None, None),
            ("CP", "Invoice Fixed Amount", "O", 1, None, None),
            ("CP", "Special Costs", "O", 1, None, None),
            ("CP", "Amount For Doctors Treatment", "O", 1, None, None),
            ("XCN", "Responsible Physician", "O", 1, None, None),
            ("CX", "Cost Center", "O", 1, None, None),
            ("CP", "Invoice Prepaid Amount", "O", 1, None, None),
            ("CP", "Total Invoice Amount Without Prepaid Amount", "O", 1, None, None),
            ("CP", "Total Amount Of Vat", "O", 1, None, None),
            ("NM", "Vat Rates Applied", "O", 0, None, None),
            ("CWE", "Benefit Group", "R", 1, None, "0556"),
            ("ST", "Provider Tax ID", "O", 1, None, None),
            ("ST", "Payer Tax ID", "O", 1, None, None),
            ("CWE", "Provider Tax Status", "O", 1, None, "0572"),
            ("CWE", "Payer Tax Status", "O", 1, None, "0572"),
            ("ST", "Sales Tax ID", "O", 1, None, None),
        ),
    ),
    "IVT": (
        "Material Location",
        (
            ("SI", "Set ID IVT", "R", 1, None, None),
            ("EI", "Inventory Location Identifier", "R", 1, None, None),
            ("ST", "Inventory Location Name", "O", 1, None, None),
            ("EI", "Source Location Identifier", "O", 1, None, None),
            ("ST", "Source Location Name", "O", 1, None, None),
            ("CWE", "Item Status", "O", 1, None, "0625"),
            ("EI", "Bin Location Identifier", "O", 0, None, None),
            ("CWE", "Order Packaging", "O", 1, None, "0818"),
            ("CWE", "Issue Packaging", "O", 1, None, None),
            ("EI", "Default Inventory Asset Account", "O", 1, None, None),
            ("CNE", "Patient Chargeable Indicator", "O", 1, None, "0532"),
            ("CWE", "Transaction Code", "O", 1, None, "0132"),
            ("CP", "Transaction Amount Unit", "O", 1, None, None),
            ("CWE", "Item Importance Code", "O", 1, None, "0634"),
            ("CNE", "Stocked Item Indicator", "O", 1, None, "0532"),
            ("CNE", "Consignment Item Indicator", "O", 1, None, "0532"),
            ("CNE", "Reusable Item Indicator", "O", 1, None, "0532"),
            ("CP", "Reusable Cost", "O", 1, None, None),
            ("EI", "Substitute Item Identifier", "O", 0, None, None),
            ("EI", "Latex Free Substitute Item Identifier", "O", 1, None, None),
            ("CWE", "Recommended Reorder Theory", "O", 1, None, "0642"),
            ("NM", "Recommended Safety Stock Days", "O", 1, None, None),
            ("NM", "Recommended Maximum Days Inventory", "O", 1, None, None),
            ("NM", "Recommended Order Point", "O", 1, None, None),
            ("NM", "Recommended Order Amount", "O", 1, None, None),
            ("CNE", "Operating Room Par Level Indicator", "O", 1, None, "0532"),
        ),
    ),
    "LAN": (
        "Language Detail",
        (
            ("SI", "Set ID LAN", "R", 1, None, None),
            ("CWE", "Language Code", "R", 1, None, "0296"),
            ("CWE", "Language Ability Code", "O", 0, None, "0403"),
            ("CWE", "Language Proficiency Code", "O", 1, None, "0404"),
        ),
    ),
    "LCC": (
        "Location Charge Code",
        (
            ("PL", "Primary Key Value LCC", "R", 1, None, None),
            ("CWE", "Location Department", "R", 1, None, "0264"),
            ("CWE", "Accommodation Type", "O", 0, None, "0129"),
            ("CWE", "Charge Code", "R", 0, None, "0132"),
        ),
    ),
    "LCH": (
        "Location Characteristic",
        (
            ("PL", "Primary Key Value LCH", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("EI", "Segment Unique Key", "O", 1, None, None),
            ("CWE", "Location Characteristic ID", "R", 1, None, "0324"),
            ("CWE", "Location Characteristic Value LCH", "R", 1, None, "0136"),
        ),
    ),
    "LDP": (
        "Location Department",
        (
            ("PL", "Primary Key Value LDP", "R", 1, None, None),
            ("CWE", "Location Department", "R", 1, None, "0264"),
            ("CWE", "Location Service", "O", 0, None, "0069"),
            ("CWE", "Specialty Type", "O", 0, None, "0265"),
            ("CWE", "Valid Patient Classes", "O", 0, None, "0004"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("DTM", "Activation Date LDP", "O", 1, None, None),
            ("DTM", "Inactivation Date LDP", "O", 1, None, None),
            ("ST", "Inactivated Reason", "O", 1, None, None),
            ("VH", "Visiting Hours", "O", 0, None, "0267"),
            ("XTN", "Contact Phone", "O", 1, None, None),
            ("CWE", "Location Cost Center", "O", 1, None, "0462"),
        ),
    ),
    "LOC": (
        "Location Identification",
        (
            ("PL", "Primary Key Value LOC", "R", 1, None, None),
            ("ST", "Location Description", "O", 1, None, None),
            ("CWE", "Location Type LOC", "R", 0, None, "0260"),
            ("XON", "Organization Name LOC", "O", 0, None, None),
            ("XAD", "Location Address", "O", 0, None, None),
            ("XTN", "Location Phone", "O", 0, None, None),
            ("CWE", "License Number", "O", 0, None, "0461"),
            ("CWE", "Location Equipment", "O", 0, None, "0261"),
            ("CWE", "Location Service Code", "O", 1, None, "0442"),
        ),
    ),
    "LRL": (
        "Location Relationship",
        (
            ("PL", "Primary Key Value LRL", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("EI", "Segment Unique Key", "O", 1, None, None),
            ("CWE", "Location Relationship ID", "R", 1, None, "0325"),
            ("XON", "Organizational Location Relationship Value", "O", 0, None, None),
            ("PL", "Patient Location Relationship Value", "O", 1, None, None),
        ),
    ),
    "MFA": (
        "Master File Acknowledgment",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("DTM", "Event Completion Date Time", "O", 1, None, None),
            ("CWE", "Mfn Record Level Error Return", "R", 1, None, "0181"),
            ("varies", "Primary Key Value MFA", "R", 0, None, "9999"),
            ("ID", "Primary Key Value Type MFA", "R", 0, None, "0355"),
        ),
    ),
    "MFE": (
        "Master File Entry",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("DTM", "Effective Date Time", "O", 1, None, None),
            ("varies", "Primary Key Value MFE", "R", 0, None, "9999"),
            ("ID", "Primary Key Value Type", "R", 0, None, "0355"),
            ("DTM", "Entered Date Time", "O", 1, None, None),
            ("XCN", "Entered By", "O", 1, None, None),
        ),
    ),
    "MFI": (
        "Master File Identification",
        (
            ("CWE", "Master File Identifier", "R", 1, None, "0175"),
            ("HD", "Master File Application Identifier", "O", 0, None, "0361"),
            ("ID", "File Level Event Code", "R", 1, None, "0178"),
            ("DTM", "Entered Date Time", "O", 1, None, None),
            ("DTM", "Effective Date Time", "O", 1, None, None),
            ("ID", "Response Level Code", "R", 1, None, "0179"),
        ),
    ),
    "MRG": (
        "Merge Patient Information",
        (
            ("CX", "Prior Patient Identifier List", "R", 0, None, "0061"),
            ("WD", "Prior Alternate Patient ID", "B", 1, None, None),
            ("CX", "Prior Patient Account Number", "O", 1, None, "0061"),
            ("WD", "Prior Patient ID", "B", 1, None, None),
            ("CX", "Prior Visit Number", "O", 1, None, "0061"),
            ("CX", "Prior Alternate Visit ID", "O", 1, None, "0061"),
            ("XPN", "Prior Patient Name", "O", 0, None, "0200"),
        ),
    ),
    "MSA": (
        "Message Acknowledgment",
        (
            ("ID", "Acknowledgment Code", "R", 1, 2, "0008"),
            ("ST", "Message Control ID", "R", 1, 20, None),
            ("WD", "Text Message", "B", 1, None, None),
            ("NM", "Expected Sequence Number", "O", 1, 15, None),
            ("WD", "Delayed Aknowledgement Type", "B", 1, None, None),
            ("WD", "Error Condition", "B", 1, None, None),
            ("NM", "Message Waiting Number", "O", 1, 5, None),
            ("ID", "Message Waiting Priority", "O", 1, 1, "0520"),
        ),
    ),
    "MSH": (
        "Message Header",
        (
            ("ST", "Field Separator", "R", 1, 1, None),
            ("ST", "Encoding Characters", "R", 1, 4, None),
            ("HD", "Sending Application", "O", 1, 227, "0361"),
            ("HD", "Sending Facility", "O", 1, 227, "0362"),
            ("HD", "Receiving Application", "O", 1, 227, "0361"),
            ("HD", "Receiving Facility", "O", 1, 227, "0362"),
            ("DTM", "Date/Time Of Message", "R", 1, 26, None),
            ("ST", "Security", "O", 1, 40, None),
            ("MSG", "Message Type", "R", 1, 15, None),
            ("ST", "Message Control ID", "R", 1, 20, None),
            ("PT", "Processing ID", "R", 1, 3, None),
            ("VID", "Version ID", "R", 1, 60, None),
            ("NM", "Sequence Number", "O", 1, 15, None),
            ("ST", "Continuation Pointer", "O", 1, 180, None),
            ("ID", "Accept Acknowledgment Type", "O", 1, 2, "0155"),
            ("ID", "Application Acknowledgment Type", "O", 1, 2, "0155"),
            ("ID", "Country Code", "O", 1, 3, "0399"),
            ("ID", "Character Set", "O", 0, 16, "0211"),
            ("CWE", "Principal Language Of Message", "O", 1, 250, None),
            ("ID", "Alternate Character Set Handling Scheme", "O", 1, 20, "0356"),
            ("EI", "Message Profile Identifier", "O", 0, 427, None),
            ("XON", "Sending Responsible Organization", "O", 1, 567, None),
            ("XON", "Receiving Responsible Organization", "O", 1, 567, None),
            ("HD", "Sending Network Address", "O", 1, 227, None),
            ("HD", "Receiving Network Address", "O", 1, 227, None),
        ),
    ),
    "NCK": ("System Clock", (("DTM", "System Date Time", "R", 1, None, None),)),
    "NDS": (
        "Notification Detail",
        (
            ("NM", "Notification Reference Number", "R", 1, None, None),
            ("DTM", "Notification Date Time", "R", 1, None, None),
            ("CWE", "Notification Alert Severity", "R", 1, None, "0367"),
            ("CWE", "Notification Code", "R", 1, None, "9999"),
        ),
    ),
    "NK1": (
        "Next of Kin / Associated Parties",
        (
            ("SI", "Set ID - NK1", "R", 1, 4, None),
            ("XPN", "Name", "O", 0, 250, "0200"),
            ("CWE", "Relationship", "O", 1, 250, "0063"),
            ("XAD", "Address", "O", 0, 250, None),
            ("XTN", "Phone Number", "O", 0, 250, None),
            ("XTN", "Business Phone Number", "O", 0, 250, None),
            ("CWE", "Contact Role", "O", 1, 250, "0131"),
            ("DT", "Start Date", "O", 1, 8, None),
            ("DT", "End Date", "O", 1, 8, None),
            ("ST", "Next of Kin / Associated Parties Job Title", "O", 1, 60, None),
            (
                "JCC",
                "Next of Kin / Associated Parties Job Code/Class",
                "O",
                1,
                20,
                None,
            ),
            (
                "CX",
                "Next of Kin / Associated Parties Employee Number",
                "O",
                1,
                250,
                None,
            ),
            ("XON", "Organization Name - NK1", "O", 0, 250, None),
            ("CWE", "Marital Status", "O", 1, 250, "0002"),
            ("CWE", "Administrative Sex", "O", 1, None, "0001"),
            ("DTM", "Date/Time of Birth", "O", 1, 26, None),
            ("CWE", "Living Dependency", "O", 0, None, "0223"),
            ("CWE", "Ambulatory Status", "O", 0, None, "0009"),
            ("CWE", "Citizenship", "O", 0, 250, "0171"),
            ("CWE", "Primary Language", "O", 1, 250, "0296"),
            ("CWE", "Living Arrangement", "O", 1, None, "0220"),
            ("CWE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("CWE", "Student Indicator", "O", 1, None, "0231"),
            ("CWE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CWE", "Nationality", "O", 1, 250, "0212"),
            ("CWE", "Ethnic Group", "O", 0, 250, "0189"),
            ("CWE", "Contact Reason", "O", 0, 250, "0222"),
            ("XPN", "Contact Person's Name", "O", 0, 250, "0200"),
            ("XTN", "Contact Person's Telephone Number", "O", 0, 250, None),
            ("XAD", "Contact Person's Address", "O", 0, 250, None),
            ("CX", "Next of Kin/Associated Party's Identifiers", "O", 0, 250, None),
            ("CWE", "Job Status", "O", 1, None, "0311"),
            ("CWE", "Race", "O", 0, 250, "0005"),
            ("CWE", "Handicap", "O", 1, None, "0295"),
            ("ST", "Contact Person Social Security Number", "O", 1, 16, None),
            ("ST", "Next of Kin Birth Place", "O", 1, 250, None),
            ("CWE", "Vip Indicator", "O", 1, None, "0099"),
            ("XTN", "Next Of Kin Telecommunication Information", "O", 1, None, None),
            (
                "XTN",
                "Contact Person S Telecommunication Information",
                "O",
                1,
                None,
                None,
            ),
        ),
    ),
    "NPU": (
        "Bed Status Update",
        (
            ("PL", "Bed Location", "R", 1, None, None),
            ("CWE", "Bed Status", "O", 1, None, "0116"),
        ),
    ),
    "NSC": (
        "Application Status Change",
        (
            ("CWE", "Application Change Type", "R", 1, None, "0409"),
            ("ST", "Current Cpu", "O", 1, None, None),
            ("ST", "Current Fileserver", "O", 1, None, None),
            ("HD", "Current Application", "O", 1, None, "0361"),
            ("HD", "Current Facility", "O", 1, None, "0362"),
            ("ST", "New Cpu", "O", 1, None, None),
            ("ST", "New Fileserver", "O", 1, None, None),
            ("HD", "New Application", "O", 1, None, "0361"),
            ("HD", "New Facility", "O", 1, None, "0362"),
        ),
    ),
    "NST": (
        "Application Control Level Statistics",
        (
            ("ID", "Statistics Available", "R", 1, None, "0136"),
            ("ST", "Source Identifier", "O", 1, None, None),
            ("ID", "Source Type", "O", 1, None, "0332"),
            ("DTM", "Statistics Start", "O", 1, None, None),
            ("DTM", "Statistics End", "O", 1, None, None),
            ("NM", "Receive Character Count", "O", 1, None, None),
            ("NM", "Send Character Count", "O", 1, None, None),
            ("NM", "Messages Received", "O", 1, None, None),
            ("NM", "Messages Sent", "O", 1, None, None),
            ("NM", "Checksum Errors Received", "O", 1, None, None),
            ("NM", "Length Errors Received", "O", 1, None, None),
            ("NM", "Other Errors Received", "O", 1, None, None),
            ("NM", "Connect Timeouts", "O", 1, None, None),
            ("NM", "Receive Timeouts", "O", 1, None, None),
            ("NM", "Application Control Level Errors", "O", 1, None, None),
        ),
    ),
    "NTE": (
        "Notes and Comments",
        (
            ("SI", "Set ID - NTE", "O", 1, 4, None),
            ("ID", "Source of Comment", "O", 1, 8, "0105"),
            ("FT", "Comment", "O", 0, 65536, None),
            ("CWE", "Comment Type", "O", 1, 250, "0364"),
            ("XCN", "Entered By", "O", 1, None, None),
            ("DTM", "Entered Date Time", "O", 1, None, None),
            ("DTM", "Effective Start Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
        ),
    ),
    "OBR": (
        "Observation Request",
        (
            ("SI", "Set ID - OBR", "O", 1, 4, None),
            ("EI", "Placer Order Number", "O", 1, 22, None),
            ("EI", "Filler Order Number", "O", 1, 22, None),
            ("CWE", "Universal Service Identifier", "R", 1, 250, None),
            ("WD", "Priority", "B", 1, None, None),
            ("WD", "Requested Date Time", "B", 1, None, None),
            ("DTM", "Observation Date/Time", "O", 1, 26, None),
            ("DTM", "Observation End Date/Time", "O", 1, 26, None),
            ("CQ", "Collection Volume", "O", 1, 20, None),
            ("XCN", "Collector Identifier", "O", 0, 250, None),
            ("ID", "Specimen Action Code", "O", 1, 1, "0065"),
            ("CWE", "Danger Code", "O", 1, 250, "9999"),
            ("CWE", "Relevant Clinical Information", "O", 0, None, "0916"),
            ("WD", "Specimen Received Date Time", "B", 1, None, None),
            ("WD", "Speciment Source", "B", 1, None, None),
            ("XCN", "Ordering Provider", "O", 0, 250, None),
            ("XTN", "Order Callback Phone Number", "O", 2, 250, None),
            ("ST", "Placer Field 1", "O", 1, 60, None),
            ("ST", "Placer Field 2", "O", 1, 60, None),
            ("ST", "Filler Field 1", "O", 1, 60, None),
            ("ST", "Filler Field 2", "O", 1, 60, None),
            ("DTM", "Results Rpt/Status Chng - Date/Time", "O", 1, 26, None),
            ("MOC", "Charge to Practice", "O", 1, 40, None),
            ("ID", "Diagnostic Serv Sect ID", "O", 1, 10, "0074"),
            ("ID", "Result Status", "O", 1, 1, "0123"),
            ("PRL", "Parent Result", "O", 1, 400, None),
            ("PRL", "Parent Result", "B", 1, None, None),
            ("XCN", "Result Copies To", "O", 0, 250, None),
            ("EIP", "Parent", "O", 1, 200, None),
            ("ID", "Transportation Mode", "O", 1, 20, "0124"),
            ("CWE", "Reason for Study", "O", 0, 250, "9999"),
            ("NDL", "Principal Result Interpreter", "O", 1, 200, None),
            ("NDL", "Assistant Result Interpreter", "O", 0, 200, None),
            ("NDL", "Technician", "O", 0, 200, None),
            ("NDL", "Transcriptionist", "O", 0, 200, None),
            ("DTM", "Scheduled Date/Time", "O", 1, 26, None),
            ("NM", "Number of Sample Containers", "O", 1, 4, None),
            ("CWE", "Transport Logistics of Collected Sample", "O", 0, 250, "9999"),
            ("CWE", "Collector's Comment", "O", 0, 250, "9999"),
            ("CWE", "Transport Arrangement Responsibility", "O", 1, 250, "9999"),
            ("ID", "Transport Arranged", "O", 1, 30, "0224"),
            ("ID", "Escort Required", "O", 1, 1, "0225"),
            ("CWE", "Planned Patient Transport Comment", "O", 0, 250, "9999"),
            ("CNE", "Procedure Code", "O", 1, None, "0088"),
            ("CNE", "Procedure Code Modifier", "O", 0, None, "0340"),
            ("CWE", "Placer Supplemental Service Information", "O", 0, 250, "0411"),
            ("CWE", "Filler Supplemental Service Information", "O", 0, 250, "0411"),
            (
                "CWE",
                "Medically Necessary Duplicate Procedure Reason",
                "O",
                1,
                250,
                "0476",
            ),
            ("CWE", "Result Handling", "O", 1, None, "0507"),
            ("CWE", "Parent Universal Service Identifier", "O", 1, 250, None),
            ("EI", "Observation Group ID", "O", 1, None, None),
            ("EI", "Parent Observation Group ID", "O", 1, None, None),
            ("CX", "Alternate Placer Order Number", "O", 0, None, None),
            ("EIP", "Parent Order", "O", 1, None, None),
        ),
    ),
    "OBX": (
        "Observation/Result",
        (
            ("SI", "Set ID - OBX", "O", 1, 4, None),
            ("ID", "Value Type", "R", 1, 2, "0125"),
            ("CWE", "Observation Identifier", "R", 1, 250, "9999"),
            ("ST", "Observation Sub-ID", "R", 1, 20, None),
            ("varies", "Observation Value", "O", 0, 99999, None),
            ("CWE", "Units", "O", 1, 250, "9999"),
            ("ST", "References Range", "O", 1, 60, None),
            ("CWE", "Interpretation Codes", "O", 0, None, "0078"),
            ("NM", "Probability", "O", 1, 5, None),
            ("ID", "Nature of Abnormal Test", "O", 0, 2, "0080"),
            ("ID", "Observation Result Status", "R", 1, 1, "0085"),
            ("DTM", "Effective Date of Reference Range", "O", 1, 26, None),
            ("ST", "User Defined Access Checks", "O", 1, 20, None),
            ("DTM", "Date/Time of the Observation", "O", 1, 26, None),
            ("CWE", "Producer's ID", "O", 1, 250, "9999"),
            ("XCN", "Responsible Observer", "O", 0, 250, None),
            ("CWE", "Observation Method", "O", 0, 250, "9999"),
            ("EI", "Equipment Instance Identifier", "O", 0, 22, None),
            ("DTM", "Date/Time of the Analysis", "O", 1, 26, None),
            ("CWE", "Observation Site", "O", 0, 705, "0163"),
            ("EI", "Observation Instance Identifier", "O", 1, 427, None),
            ("CNE", "Mood Code", "O", 1, 705, "0725"),
            ("XON", "Performing Organization Name", "O", 0, 567, None),
            ("XAD", "Performing Organization Address", "O", 0, 631, None),
            ("XCN", "Performing Organization Medical Director", "O", 0, 3002, None),
            ("ID", "Patient Results Release Category", "O", 0, None, "0909"),
        ),
    ),
    "ODS": (
        "Dietary Orders, Supplements, and Preferences",
        (
            ("ID", "Type", "R", 1, None, "0159"),
            ("CWE", "Service Period", "O", 10, None, "9999"),
            ("CWE", "Diet Supplement Or Preference Code", "R", 20, None, "9999"),
            ("ST", "Text Instruction", "O", 2, None, None),
        ),
    ),
    "ODT": (
        "Diet Tray Instructions",
        (
            ("CWE", "Tray Type", "R", 1, None, "0160"),
            ("CWE", "Service Period", "O", 10, None, "9999"),
            ("ST", "Text Instruction", "O", 1, None, None),
        ),
    ),
    "OM1": (
        "General Segment",
        (
            ("NM", "Sequence Number Test Observation Master File", "R", 1, None, None),
            ("CWE", "Producer S Service Test Observation ID", "R", 1, None, "9999"),
            ("ID", "Permitted Data Types", "O", 0, None, "0125"),
            ("ID", "Specimen Required", "R", 1, None, "0136"),
            ("CWE", "Producer ID", "R", 1, None, "9999"),
            ("TX", "Observation Description", "O", 1, None, None),
            (
                "CWE",
                "Other Service Test Observation Ids For The Observation",
                "O",
                1,
                None,
                "9999",
            ),
            ("ST", "Other Names", "R", 0, None, None),
            ("ST", "Preferred Report Name For The Observation", "O", 1, None, None),
            (
                "ST",
                "Preferred Short Name Or Mnemonic For The Observation",
                "O",
                1,
                None,
                None,
            ),
            ("ST", "Preferred Long Name For The Observation", "O", 1, None, None),
            ("ID", "Orderability", "O", 1, None, "0136"),
            (
                "CWE",
                "Identity Of Instrument Used To Perform This Study",
                "O",
                0,
                None,
                "9999",
            ),
            ("CWE", "Coded Representation Of Method", "O", 0, None, "9999"),
            ("ID", "Portable Device Indicator", "O", 1, None, "0136"),
            ("CWE", "Observation Producing Department Section", "O", 0, None, "9999"),
            ("XTN", "Telephone Number Of Section", "O", 1, None, None),
            ("CWE", "Nature Of Service Test Observation", "R", 1, None, "0174"),
            ("CWE", "Report Subheader", "O", 1, None, "9999"),
            ("ST", "Report Display Order", "O", 1, None, None),
            (
                "DTM",
                "Date Time Stamp For Any Change In Definition For The Observation",
                "O",
                1,
                None,
                None,
            ),
            ("DTM", "Effective Date Time Of Change", "O", 1, None, None),
            ("NM", "Typical Turn Around Time", "O", 1, None, None),
            ("NM", "Processing Time", "O", 1, None, None),
            ("ID", "Processing Priority", "O", 0, None, "0168"),
            ("ID", "Reporting Priority", "O", 1, None, "0169"),
            (
                "CWE",
                "Outside Site S Where Observation May Be Performed",
                "O",
                0,
                None,
                "9999",
            ),
            ("XAD", "Address Of Outside Site S", "O", 0, None, None),
            ("XTN", "Phone Number Of Outside Site", "O", 1, None, None),
            ("CWE", "Confidentiality Code", "O", 1, None, "0177"),
            (
                "CWE",
                "Observations Required To Interpret This Observation",
                "O",
                1,
                None,
                "9999",
            ),
            ("TX", "Interpretation Of Observations", "O", 1, None, None),
            ("CWE", "Contraindications To Observations", "O", 1, None, "9999"),
            ("CWE", "Reflex Tests Observations", "O", 0, None, "9999"),
            ("TX", "Rules That Trigger Reflex Testing", "O", 1, None, None),
            ("CWE", "Fixed Canned Message", "O", 1, None, "9999"),
            ("TX", "Patient Preparation", "O", 1, None, None),
            ("CWE", "Procedure Medication", "O", 1, None, "9999"),
            ("TX", "Factors That May Affect The Observation", "O", 1, None, None),
            ("ST", "Service Test Observation Performance Schedule", "O", 0, None, None),
            ("TX", "Description Of Test Methods", "O", 1, None, None),
            ("CWE", "Kind Of Quantity Observed", "O", 1, None, "0254"),
            ("CWE", "Point Versus Interval", "O", 1, None, "0255"),
            ("TX", "Challenge Information", "O", 1, None, "0256"),
            ("CWE", "Relationship Modifier", "O", 1, None, "0258"),
            ("CWE", "Target Anatomic Site Of Test", "O", 1, None, "9999"),
            ("CWE", "Modality Of Imaging Measurement", "O", 1, None, "0910"),
        ),
    ),
    "OM2": (
        "Numeric Observation",
        (
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("CWE", "Units Of Measure", "O", 1, None, "9999"),
            ("NM", "Range Of Decimal Precision", "O", 0, None, None),
            ("CWE", "Corresponding Si Units Of Measure", "O", 1, None, "9999"),
            ("TX", "Si Conversion Factor", "O", 1, None, None),
            (
                "RFR",
                "Reference Normal Range For Ordinal And Continuous Observations",
                "O",
                0,
                None,
                None,
            ),
            (
                "RFR",
                "Critical Range For Ordinal And Continuous Observations",
                "O",
                0,
                None,
                None,
            ),
            (
                "RFR",
                "Absolute Range For Ordinal And Continuous Observations",
                "O",
                1,
                None,
                None,
            ),
            ("DLT", "Delta Check Criteria", "O", 0, None, None),
            ("NM", "Minimum Meaningful Increments", "O", 1, None, None),
        ),
    ),
    "OM3": (
        "Categorical Service/Test/Observation",
        (
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("CWE", "Preferred Coding System", "O", 1, None, "9999"),
            ("CWE", "Valid Coded Answers", "O", 0, None, "9999"),
            (
                "CWE",
                "Normal Text Codes For Categorical Observations",
                "O",
                0,
                None,
                "9999",
            ),
            (
                "CWE",
                "Abnormal Text Codes For Categorical Observations",
                "O",
                0,
                None,
                "9999",
            ),
            (
                "CWE",
                "Critical Text Codes For Categorical Observations",
                "O",
                0,
                None,
                "9999",
            ),
            ("ID", "Value Type", "O", 1, None, "0125"),
        ),
    ),
    "OM4": (
        "Observations that Require Specimens",
        (
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("ID", "Derived Specimen", "O", 1, None, "0170"),
            ("TX", "Container Description", "O", 1, None, None),
            ("NM", "Container Volume", "O", 1, None, None),
            ("CWE", "Container Units", "O", 1, None, "9999"),
            ("CWE", "Specimen", "O", 1, None, "9999"),
            ("CWE", "Additive", "O", 1, None, "0371"),
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
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            (
                "CWE",
                "Test Observations Included Within An Ordered Test Battery",
                "O",
                0,
                None,
                "9999",
            ),
            ("ST", "Observation ID Suffixes", "O", 1, None, None),
        ),
    ),
    "OM6": (
        "Observations that are Calculated from Other Observations",
        (
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("TX", "Derivation Rule", "O", 1, None, None),
        ),
    ),
    "OM7": (
        "Additional Basic Attributes",
        (
            ("NM", "Sequence Number Test Observation Master File", "R", 1, None, None),
            ("CWE", "Universal Service Identifier", "R", 1, None, None),
            ("CWE", "Category Identifier", "O", 0, None, "0412"),
            ("TX", "Category Description", "O", 1, None, None),
            ("ST", "Category Synonym", "O", 0, None, None),
            ("DTM", "Effective Test Service Start Date Time", "O", 1, None, None),
            ("DTM", "Effective Test Service End Date Time", "O", 1, None, None),
            ("NM", "Test Service Default Duration Quantity", "O", 1, None, None),
            ("CWE", "Test Service Default Duration Units", "O", 1, None, "9999"),
            ("CWE", "Test Service Default Frequency", "O", 1, None, None),
            ("ID", "Consent Indicator", "O", 1, None, "0136"),
            ("CWE", "Consent Identifier", "O", 1, None, "0413"),
            ("DTM", "Consent Effective Start Date Time", "O", 1, None, None),
            ("DTM", "Consent Effective End Date Time", "O", 1, None, None),
            ("NM", "Consent Interval Quantity", "O", 1, None, None),
            ("CWE", "Consent Interval Units", "O", 1, None, "0414"),
            ("NM", "Consent Waiting Period Quantity", "O", 1, None, None),
            ("CWE", "Consent Waiting Period Units", "O", 1, None, "0414"),
            ("DTM", "Effective Date Time Of Change", "O", 1, None, None),
            ("XCN", "Entered By", "O", 1, None, None),
            ("PL", "Orderable At Location", "O", 0, None, None),
            ("CWE", "Formulary Status", "O", 1, None, "0473"),
            ("ID", "Special Order Indicator", "O", 1, None, "0136"),
            ("CWE", "Primary Key Value CDM", "O", 0, None, "0132"),
        ),
    ),
    "ORC": (
        "Common Order",
        (
            ("ID", "Order Control", "R", 1, 2, "0119"),
            ("EI", "Placer Order Number", "O", 1, 22, None),
            ("EI", "Filler Order Number", "O", 1, 22, None),
            ("EI", "Placer Group Number", "O", 1, 22, None),
            ("ID", "Order Status", "O", 1, 2, "0038"),
            ("ID", "Response Flag", "O", 1, 1, "0121"),
            ("WD", "Quantity Timing", "B", 1, None, "0121"),
            ("EIP", "Parent", "O", 1, 200, None),
            ("DTM", "Date/Time of Transaction", "O", 1, 26, None),
            ("XCN", "Entered By", "O", 0, 250, None),
            ("XCN", "Verified By", "O", 0, 250, None),
            ("XCN", "Ordering Provider", "O", 0, 250, None),
            ("PL", "Enterer's Location", "O", 1, 80, None),
            ("XTN", "Call Back Phone Number", "O", 2, 250, None),
            ("DTM", "Order Effective Date/Time", "O", 1, 26, None),
            ("CWE", "Order Control Code Reason", "O", 1, 250, "9999"),
            ("CWE", "Entering Organization", "O", 1, 250, "9999"),
            ("CWE", "Entering Device", "O", 1, 250, "9999"),
            ("XCN", "Action By", "O", 0, 250, None),
            ("CWE", "Advanced Beneficiary Notice Code", "O", 1, 250, "0339"),
            ("XON", "Ordering Facility Name", "O", 0, 250, None),
            ("XAD", "Ordering Facility Address", "O", 0, 250, None),
            ("XTN", "Ordering Facility Phone Number", "O", 0, 250, None),
            ("XAD", "Ordering Provider Address", "O", 0, 250, None),
            ("CWE", "Order Status Modifier", "O", 1, 250, "9999"),
            ("CWE", "Advanced Beneficiary Notice Override Reason", "O", 1, 60, "0552"),
            ("DTM", "Filler's Expected Availability Date/Time", "O", 1, 26, None),
            ("CWE", "Confidentiality Code", "O", 1, 250, "0177"),
            ("CWE", "Order Type", "O", 1, 250, "0482"),
            ("CNE", "Enterer Authorization Mode", "O", 1, 250, "0483"),
            ("CWE", "Parent Universal Service Identifier", "O", 1, 250, None),
            ("DT", "Advanced Beneficiary Notice Date", "O", 1, None, None),
            ("CX", "Alternate Placer Order Number", "O", 0, None, None),
        ),
    ),
    "ORG": (
        "Practitioner Organization Unit",
        (
            ("SI", "Set ID ORG", "R", 1, None, None),
            ("CWE", "Organization Unit Code", "O", 1, None, "0405"),
            ("CWE", "Organization Unit Type Code", "O", 1, None, "0474"),
            ("ID", "Primary Org Unit Indicator", "O", 1, None, "0136"),
            ("CX", "Practitioner Org Unit Identifier", "O", 1, None, None),
            ("CWE", "Health Care Provider Type Code", "O", 1, None, "0452"),
            ("CWE", "Health Care Provider Classification Code", "O", 1, None, "0453"),
            (
                "CWE",
                "Health Care Provider Area Of Specialization Code",
                "O",
                1,
                None,
                "0454",
            ),
            ("DR", "Effective Date Range", "O", 1, None, None),
            ("CWE", "Employment Status Code", "O", 1, None, "0066"),
            ("ID", "Board Approval Indicator", "O", 1, None, "0136"),
            ("ID", "Primary Care Physician Indicator", "O", 1, None, "0136"),
            ("CWE", "Cost Center Code", "O", 0, None, "0539"),
        ),
    ),
    "OVR": (
        "Override Segment",
        (
            ("CWE", "Business Rule Override Type", "O", 1, None, "0518"),
            ("CWE", "Business Rule Override Code", "O", 1, None, "0521"),
            ("TX", "Override Comments", "O", 1, None, None),
            ("XCN", "Override Entered By", "O", 1, None, None),
            ("XCN", "Override Authorized By", "O", 1, None, None),
        ),
    ),
    "PAC": (
        "Shipment Package",
        (
            ("SI", "Set ID PAC", "R", 0, None, None),
            ("EI", "Package ID", "O", 0, None, None),
            ("EI", "Parent Package ID", "O", 0, None, None),
            ("NA", "Position In Parent Package", "O", 0, None, None),
            ("CWE", "Package Type", "R", 0, None, "0908"),
            ("CWE", "Package Condition", "O", 0, None, "0544"),
            ("CWE", "Package Handling Code", "O", 0, None, "0376"),
            ("CWE", "Package Risk Code", "O", 0, None, "0489"),
        ),
    ),
    "PCE": (
        "Patient Charge Cost Center Exceptions",
        (
            ("SI", "Set ID PCE", "R", 1, None, None),
            ("CX", "Cost Center Account Number", "O", 1, None, "0319"),
            ("CWE", "Transaction Code", "O", 1, None, "0132"),
            ("CP", "Transaction Amount Unit", "O", 1, None, None),
        ),
    ),
    "PCR": (
        "Possible Causal Relationship",
        (
            ("CWE", "Implicated Product", "R", 1, None, "9999"),
            ("IS", "Generic Product", "O", 1, None, "0249"),
            ("CWE", "Product Class", "O", 1, None, "9999"),
            ("CQ", "Total Duration Of Therapy", "O", 1, None, None),
            ("DTM", "Product Manufacture Date", "O", 1, None, None),
            ("DTM", "Product Expiration Date", "O", 1, None, None),
            ("DTM", "Product Implantation Date", "O", 1, None, None),
            ("DTM", "Product Explantation Date", "O", 1, None, None),
            ("CWE", "Single Use Device", "O", 1, None, "0244"),
            ("CWE", "Indication For Product Use", "O", 1, None, "9999"),
            ("CWE", "Product Problem", "O", 1, None, "0245"),
            ("ST", "Product Serial Lot Number", "O", 3, None, None),
            ("CWE", "Product Available For Inspection", "O", 1, None, "0246"),
            ("CWE", "Product Evaluation Performed", "O", 1, None, "9999"),
            ("CWE", "Product Evaluation Status", "O", 1, None, "0247"),
            ("CWE", "Product Evaluation Results", "O", 1, None, "9999"),
            ("ID", "Evaluated Product Source", "O", 1, None, "0248"),
            ("DTM", "Date Product Returned To Manufacturer", "O", 1, None, None),
            ("ID", "Device Operator Qualifications", "O", 1, None, "0242"),
            ("ID", "Relatedness Assessment", "O", 1, None, "0250"),
            ("ID", "Action Taken In Response To The Event", "O", 6, None, "0251"),
            ("ID", "Event Causality Observations", "O", 6, None, "0252"),
            ("ID", "Indirect Exposure Mechanism", "O", 3, None, "0253"),
        ),
    ),
    "PD1": (
        "Patient Additional Demographic",
        (
            ("CWE", "Living Dependency", "O", 0, None, "0223"),
            ("CWE", "Living Arrangement", "O", 1, None, "0220"),
            ("XON", "Patient Primary Facility", "O", 0, 250, "0204"),
            ("WD", "Patient Primary Care Provider Name Id no", "B", 1, None, "0204"),
            ("CWE", "Student Indicator", "O", 1, None, "0231"),
            ("CWE", "Handicap", "O", 1, None, "0295"),
            ("CWE", "Living Will Code", "O", 1, None, "0315"),
            ("CWE", "Organ Donor Code", "O", 1, None, "0316"),
            ("ID", "Separate Bill", "O", 1, 1, "0136"),
            ("CX", "Duplicate Patient", "O", 0, 250, None),
            ("CWE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("DT", "Protection Indicator Effective Date", "O", 1, 8, None),
            ("XON", "Place of Worship", "O", 0, 250, None),
            ("CWE", "Advance Directive Code", "O", 0, 250, "0435"),
            ("CWE", "Immunization Registry Status", "O", 1, None, "0441"),
            ("DT", "Immunization Registry Status Effective Date", "O", 1, 8, None),
            ("DT", "Publicity Code Effective Date", "O", 1, 8, None),
            ("CWE", "Military Branch", "O", 1, None, "0140"),
            ("CWE", "Military Rank Grade", "O", 1, None, "0141"),
            ("CWE", "Military Status", "O", 1, None, "0142"),
            ("DT", "Advance Directive Last Verified Date", "O", 1, None, None),
        ),
    ),
    "PDA": (
        "Patient Death and Autopsy",
        (
            ("CWE", "Death Cause Code", "O", 0, 250, None),
            ("PL", "Death Location", "O", 1, 80, None),
            ("ID", "Death Certified Indicator", "O", 1, 1, "0136"),
            ("DTM", "Death Certificate Signed Date/Time", "O", 1, 26, None),
            ("XCN", "Death Certified By", "O", 1, 250, None),
            ("ID", "Autopsy Indicator", "O", 1, 1, "0136"),
            ("DR", "Autopsy Start and End Date/Time", "O", 1, 53, None),
            ("XCN", "Autopsy Performed By", "O", 1, 250, None),
            ("ID", "Coroner Indicator", "O", 1, 1, "0136"),
        ),
    ),
    "PDC": (
        "Product Detail Country",
        (
            ("XON", "Manufacturer Distributor", "R", 0, None, None),
            ("CWE", "Country", "R", 1, None, "9999"),
            ("ST", "Brand Name", "R", 1, None, None),
            ("ST", "Device Family Name", "O", 1, None, None),
            ("CWE", "Generic Name", "O", 1, None, "9999"),
            ("ST", "Model Identifier", "O", 0, None, None),
            ("ST", "Catalogue Identifier", "O", 1, None, None),
            ("ST", "Other Identifier", "O", 0, None, None),
            ("CWE", "Product Code", "O", 1, None, "9999"),
            ("ID", "Marketing Basis", "O", 1, None, "0330"),
            ("ST", "Marketing Approval ID", "O", 1, None, None),
            ("CQ", "Labeled Shelf Life", "O", 1, None, None),
            ("CQ", "Expected Shelf Life", "O", 1, None, None),
            ("DTM", "Date First Marketed", "O", 1, None, None),
            ("DTM", "Date Last Marketed", "O", 1, None, None),
        ),
    ),
    "PEO": (
        "Product Experience Observation",
        (
            ("CWE", "Event Identifiers Used", "O", 0, None, "9999"),
            ("CWE", "Event Symptom Diagnosis Code", "O", 0, None, "9999"),
            ("DTM", "Event Onset Date Time", "R", 1, None, None),
            ("DTM", "Event Exacerbation Date Time", "O", 1, None, None),
            ("DTM", "Event Improved Date Time", "O", 1, None, None),
            ("DTM", "Event Ended Data Time", "O", 1, None, None),
            ("XAD", "Event Location Occurred Address", "O", 0, None, None),
            ("ID", "Event Qualification", "O", 0, None, "0237"),
            ("ID", "Event Serious", "O", 1, None, "0238"),
            ("ID", "Event Expected", "O", 1, None, "0239"),
            ("ID", "Event Outcome", "O", 0, None, "0240"),
            ("ID", "Patient Outcome", "O", 1, None, "0241"),
            ("FT", "Event Description From Others", "O", 0, None, None),
            ("FT", "Event Description From Original Reporter", "O", 0, None, None),
            ("FT", "Event Description From Patient", "O", 0, None, None),
            ("FT", "Event Description From Practitioner", "O", 0, None, None),
            ("FT", "Event Description From Autopsy", "O", 0, None, None),
            ("CWE", "Cause Of Death", "O", 0, None, "9999"),
            ("XPN", "Primary Observer Name", "O", 0, None, None),
            ("XAD", "Primary Observer Address", "O", 0, None, None),
            ("XTN", "Primary Observer Telephone", "O", 0, None, None),
            ("ID", "Primary Observer S Qualification", "O", 1, None, "0242"),
            ("ID", "Confirmation Provided By", "O", 1, None, "0242"),
            ("DTM", "Primary Observer Aware Date Time", "O", 1, None, None),
            ("ID", "Primary Observer S Identity May Be Divulged", "O", 1, None, "0243"),
        ),
    ),
    "PES": (
        "Product Experience Sender",
        (
            ("XON", "Sender Organization Name", "O", 0, None, None),
            ("XCN", "Sender Individual Name", "O", 0, None, None),
            ("XAD", "Sender Address", "O", 0, None, None),
            ("XTN", "Sender Telephone", "O", 0, None, None),
            ("EI", "Sender Event Identifier", "O", 1, None, None),
            ("NM", "Sender Sequence Number", "O", 1, None, None),
            ("FT", "Sender Event Description", "O", 0, None, None),
            ("FT", "Sender Comment", "O", 1, None, None),
            ("DTM", "Sender Aware Date Time", "O", 1, None, None),
            ("DTM", "Event Report Date", "R", 1, None, None),
            ("ID", "Event Report Timing Type", "O", 2, None, "0234"),
            ("ID", "Event Report Source", "O", 1, None, "0235"),
            ("ID", "Event Reported To", "O", 0, None, "0236"),
        ),
    ),
    "PID": (
        "Patient Identification",
        (
            ("SI", "Set ID - PID", "O", 1, 4, None),
            ("WD", "Patient ID", "B", 1, None, None),
            ("CX", "Patient Identifier List", "R", 0, 250, None),
            ("WD", "Alternate Patient ID", "B", 1, None, None),
            ("XPN", "Patient Name", "R", 0, 250, "0200"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("DTM", "Date/Time of Birth", "O", 1, 26, None),
            ("CWE", "Administrative Sex", "O", 1, None, "0001"),
            ("WD", "Patient Alias", "B", 1, None, None),
            ("CWE", "Race", "O", 0, 250, "0005"),
            ("XAD", "Patient Address", "O", 0, 250, None),
            ("WD", "County Code", "B", 1, None, None),
            ("XTN", "Phone Number - Home", "O", 0, 250, None),
            ("XTN", "Phone Number - Business", "O", 0, 250, None),
            ("CWE", "Primary Language", "O", 1, 250, "0296"),
            ("CWE", "Marital Status", "O", 1, 250, "0002"),
            ("CWE", "Religion", "O", 1, 250, "0006"),
            ("CX", "Patient Account Number", "O", 1, 250, None),
            ("WD", "SSN Number", "B", 1, None, None),
            ("WD", "Drivers License Number", "B", 1, None, None),
            ("CX", "Mother's Identifier", "O", 0, 250, None),
            ("CWE", "Ethnic Group", "O", 0, 250, "0189"),
            ("ST", "Birth Place", "O", 1, 250, None),
            ("ID", "Multiple Birth Indicator", "O", 1, 1, "0136"),
            ("NM", "Birth Order", "O", 1, 2, None),
            ("CWE", "Citizenship", "O", 0, 250, "0171"),
            ("CWE", "Veterans Military Status", "O", 1, 250, "0172"),
            ("CWE", "Nationality", "B", 1, 250, "0172"),
            ("DTM", "Patient Death Date and Time", "O", 1, 26, None),
            ("ID", "Patient Death Indicator", "O", 1, 1, "0136"),
            ("ID", "Identity Unknown Indicator", "O", 1, 1, "0136"),
            ("CWE", "Identity Reliability Code", "O", 0, None, "0445"),
            ("DTM", "Last Update Date/Time", "O", 1, 26, None),
            ("HD", "Last Update Facility", "O", 1, 241, None),
            ("CWE", "Species Code", "O", 1, 250, "0446"),
            ("CWE", "Breed Code", "O", 1, 250, "0447"),
            ("ST", "Strain", "O", 1, 80, None),
            ("CWE", "Production Class Code", "O", 0, 250, "0429"),
            ("CWE", "Tribal Citizenship", "O", 0, 250, "0171"),
            ("XTN", "Patient Telecommunication Information", "O", 0, None, None),
        ),
    ),
    "PKG": (
        "Item Packaging",
        (
            ("SI", "Set ID PKG", "R", 1, None, None),
            ("CWE", "Packaging Units", "O", 1, None, "0818"),
            ("CNE", "Default Order Unit Of Measure Indicator", "O", 1, None, "0532"),
            ("NM", "Package Quantity", "O", 1, None, None),
            ("CP", "Price", "O", 1, None, None),
            ("CP", "Future Item Price", "O", 1, None, None),
            ("DTM", "Future Item Price Effective Date", "O", 1, None, None),
        ),
    ),
    "PMT": (
        "Payment Information",
        (
            ("EI", "Payment Remittance Advice Number", "R", 1, None, None),
            ("DTM", "Payment Remittance Effective Date Time", "R", 1, None, None),
            ("DTM", "Payment Remittance Expiration Date Time", "R", 1, None, None),
            ("CWE", "Payment Method", "R", 1, None, "0570"),
            ("DTM", "Payment Remittance Date Time", "R", 1, None, None),
            ("CP", "Payment Remittance Amount", "R", 1, None, None),
            ("EI", "Check Number", "O", 1, None, None),
            ("XON", "Payee Bank Identification", "O", 1, None, None),
            ("ST", "Payee Transit Number", "O", 1, None, None),
            ("CX", "Payee Bank Account ID", "O", 1, None, None),
            ("XON", "Payment Organization", "R", 1, None, None),
            ("ST", "Esr Code Line", "O", 1, None, None),
        ),
    ),
    "PR1": (
        "Procedures",
        (
            ("SI", "Set ID - PR1", "R", 1, 4, None),
            ("WD", "Procedure Coding Method", "B", 1, None, None),
            ("CNE", "Procedure Code", "R", 1, None, "0088"),
            ("WD", "Procedure Description", "B", 1, None, None),
            ("DTM", "Procedure Date/Time", "R", 1, 26, None),
            ("CWE", "Procedure Functional Type", "O", 1, None, "0230"),
            ("NM", "Procedure Minutes", "O", 1, 4, None),
            ("WD", "Anesthesiologist", "B", 1, None, None),
            ("CWE", "Anesthesia Code", "O", 1, None, "0019"),
            ("NM", "Anesthesia Minutes", "O", 1, 4, None),
            ("CWE", "Consent Code", "O", 1, None, "0059"),
            ("NM", "Procedure Priority", "O", 1, None, "0418"),
            ("CWE", "Consent Code", "O", 1, 250, "0051"),
            ("CNE", "Procedure Code Modifier", "O", 0, None, "0340"),
            ("CWE", "Associated Diagnosis Code", "O", 1, 250, "0416"),
            ("CWE", "Procedure Code Modifier", "O", 0, 250, "0417"),
            ("EI", "Procedure Identifier", "O", 1, None, None),
            ("ID", "Procedure Action Code", "O", 1, None, "0206"),
            ("CWE", "DRG Procedure Determination Status", "O", 1, None, "0761"),
            ("CWE", "DRG Procedure Relevance", "O", 1, None, "0763"),
            ("PL", "Treating Organizational Unit", "O", 0, None, None),
            ("ID", "Respiratory Within Surgery", "O", 1, None, "0136"),
            ("EI", "Parent Procedure ID", "O", 1, None, None),
        ),
    ),
    "PRA": (
        "Practitioner Detail",
        (
            ("CWE", "Primary Key Value PRA", "O", 1, None, "9999"),
            ("CWE", "Practitioner Group", "O", 0, None, "0358"),
            ("CWE", "Practitioner Category", "O", 0, None, "0186"),
            ("ID", "Provider Billing", "O", 1, None, "0187"),
            ("SPD", "Specialty", "O", 0, None, "0337"),
            ("PLN", "Practitioner ID Numbers", "O", 0, None, "0338"),
            ("PIP", "Privileges", "O", 0, None, None),
            ("DT", "Date Entered Practice", "O", 1, None, None),
            ("CWE", "Institution", "O", 1, None, "0537"),
            ("DT", "Date Left Practice", "O", 1, None, None),
            (
                "CWE",
                "Government Reimbursement Billing Eligibility",
                "O",
                0,
                None,
                "0401",
            ),
            ("SI", "Set ID PRA", "O", 1, None, None),
        ),
    ),
    "PRB": (
        "Problem Details",
        (
            ("ID", "Action Code", "R", 1, None, "0287"),
            ("DTM", "Action Date Time", "R", 1, None, None),
            ("CWE", "Problem ID", "R", 1, None, None),
            ("EI", "Problem Instance ID", "R", 1, None, None),
            ("EI", "Episode Of Care ID", "O", 1, None, None),
            ("NM", "Problem List Priority", "O", 1, None, None),
            ("DTM", "Problem Established Date Time", "O", 1, None, None),
            ("DTM", "Anticipated Problem Resolution Date Time", "O", 1, None, None),
            ("DTM", "Actual Problem Resolution Date Time", "O", 1, None, None),
            ("CWE", "Problem Classification", "O", 1, None, None),
            ("CWE", "Problem Management Discipline", "O", 0, None, None),
            ("CWE", "Problem Persistence", "O", 1, None, None),
            ("CWE", "Problem Confirmation Status", "O", 1, None, None),
            ("CWE", "Problem Life Cycle Status", "O", 1, None, None),
            ("DTM", "Problem Life Cycle Status Date Time", "O", 1, None, None),
            ("DTM", "Problem Date Of Onset", "O", 1, None, None),
            ("ST", "Problem Onset Text", "O", 1, None, None),
            ("CWE", "Problem Ranking", "O", 1, None, None),
            ("CWE", "Certainty Of Problem", "O", 1, None, None),
            ("NM", "Probability Of Problem 0 1", "O", 1, None, None),
            ("CWE", "Individual Awareness Of Problem", "O", 1, None, None),
            ("CWE", "Problem Prognosis", "O", 1, None, None),
            ("CWE", "Individual Awareness Of Prognosis", "O", 1, None, None),
            (
                "ST",
                "Family Significant Other Awareness Of Problem Prognosis",
                "O",
                1,
                None,
                None,
            ),
            ("CWE", "Security Sensitivity", "O", 1, None, None),
            ("CWE", "Problem Severity", "O", 1, None, "0836"),
            ("CWE", "Problem Perspective", "O", 1, None, "0838"),
            ("CNE", "Mood Code", "O", 1, None, "0725"),
        ),
    ),
    "PRC": (
        "Pricing",
        (
            ("CWE", "Primary Key Value PRC", "R", 1, None, "0132"),
            ("CWE", "Facility ID PRC", "O", 0, None, "0464"),
            ("CWE", "Department", "O", 0, None, "0184"),
            ("CWE", "Valid Patient Classes", "O", 0, None, "0004"),
            ("CP", "Price", "O", 0, None, None),
            ("ST", "Formula", "O", 0, None, None),
            ("NM", "Minimum Quantity", "O", 1, None, None),
            ("NM", "Maximum Quantity", "O", 1, None, None),
            ("MO", "Minimum Price", "O", 1, None, None),
            ("MO", "Maximum Price", "O", 1, None, None),
            ("DTM", "Effective Start Date", "O", 1, None, None),
            ("DTM", "Effective End Date", "O", 1, None, None),
            ("CWE", "Price Override Flag", "O", 1, None, "0268"),
            ("CWE", "Billing Category", "O", 0, None, "0293"),
            ("ID", "Chargeable Flag", "O", 1, None, "0136"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("MO", "Cost", "O", 1, None, None),
            ("CWE", "Charge On Indicator", "O", 1, None, "0269"),
        ),
    ),
    "PRD": (
        "Provider Data",
        (
            ("CWE", "Provider Role", "R", 0, None, "0286"),
            ("XPN", "Provider Name", "O", 0, None, None),
            ("XAD", "Provider Address", "O", 0, None, None),
            ("PL", "Provider Location", "O", 1, None, None),
            ("XTN", "Provider Communication Information", "O", 0, None, None),
            ("CWE", "Preferred Method Of Contact", "O", 1, None, "0185"),
            ("PLN", "Provider Identifiers", "O", 0, None, "0338"),
            ("DTM", "Effective Start Date Of Provider Role", "O", 1, None, None),
            ("DTM", "Effective End Date Of Provider Role", "O", 0, None, None),
            ("XON", "Provider Organization Name And Identifier", "O", 0, None, None),
            ("XAD", "Provider Organization Address", "O", 0, None, None),
            ("PL", "Provider Organization Location Information", "O", 0, None, None),
            (
                "XTN",
                "Provider Organization Communication Information",
                "O",
                0,
                None,
                None,
            ),
            ("CWE", "Provider Organization Method Of Contact", "O", 0, None, "0185"),
        ),
    ),
    "PRT": (
        "Participation Information",
        (
            ("EI", "Participation Instance ID", "O", 0, None, None),
            ("ID", "Action Code", "R", 1, 2, "0287"),
            ("CWE", "Action Reason", "O", 1, None, None),
            ("CWE", "Participation", "R", 1, None, "0912"),
            ("XCN", "Participation Person", "O", 0, None, None),
            ("CWE", "Participation Person Provider Type", "O", 1, None, None),
            ("CWE", "Participant Organization Unit Type", "O", 1, None, "0406"),
            ("XON", "Participation Organization", "O", 0, None, None),
            ("PL", "Participant Location", "O", 0, None, None),
            ("EI", "Participation Device", "O", 0, None, None),
            ("DTM", "Participation Begin Date/Time (arrival time)", "O", 1, None, None),
            ("DTM", "Participation End Date/Time (departure time)", "O", 1, None, None),
            ("CWE", "Participation Qualitative Duration", "O", 1, None, None),
            ("XAD", "Participation Address", "O", 0, None, None),
            ("XTN", "Participant Telecommunication Address", "O", 0, None, None),
        ),
    ),
    "PSG": (
        "Product/Service Group",
        (
            ("EI", "Provider Product Service Group Number", "R", 1, None, None),
            ("EI", "Payer Product Service Group Number", "O", 1, None, None),
            ("SI", "Product Service Group Sequence Number", "R", 1, None, None),
            ("ID", "Adjudicate As Group", "R", 1, None, "0136"),
            ("CP", "Product Service Group Billed Amount", "R", 1, None, None),
            ("ST", "Product Service Group Description", "R", 1, None, None),
        ),
    ),
    "PSH": (
        "Product Summary Header",
        (
            ("ST", "Report Type", "R", 1, None, None),
            ("ST", "Report Form Identifier", "O", 1, None, None),
            ("DTM", "Report Date", "R", 1, None, None),
            ("DTM", "Report Interval Start Date", "O", 1, None, None),
            ("DTM", "Report Interval End Date", "O", 1, None, None),
            ("CQ", "Quantity Manufactured", "O", 1, None, None),
            ("CQ", "Quantity Distributed", "O", 1, None, None),
            ("ID", "Quantity Distributed Method", "O", 1, None, "0329"),
            ("FT", "Quantity Distributed Comment", "O", 1, None, None),
            ("CQ", "Quantity In Use", "O", 1, None, None),
            ("ID", "Quantity In Use Method", "O", 1, None, "0329"),
            ("FT", "Quantity In Use Comment", "O", 1, None, None),
            (
                "NM",
                "Number Of Product Experience Reports Filed By Facility",
                "O",
                8,
                None,
                None,
            ),
            (
                "NM",
                "Number Of Product Experience Reports Filed By Distributor",
                "O",
                8,
                None,
                None,
            ),
        ),
    ),
    "PSL": (
        "Product/Service Line Item",
        (
            ("EI", "Provider Product Service Line Item Number", "R", 1, None, None),
            ("EI", "Payer Product Service Line Item Number", "O", 1, None, None),
            ("SI", "Product Service Line Item Sequence Number", "R", 1, None, None),
            ("EI", "Provider Tracking ID", "O", 1, None, None),
            ("EI", "Payer Tracking ID", "O", 1, None, None),
            ("CWE", "Product Service Line Item Status", "R", 1, None, "0559"),
            ("CWE", "Product Service Code", "R", 1, None, "0879"),
            ("CWE", "Product Service Code Modifier", "O", 0, None, "0880"),
            ("ST", "Product Service Code Description", "O", 1, None, None),
            ("DTM", "Product Service Effective Date", "O", 1, None, None),
            ("DTM", "Product Service Expiration Date", "O", 1, None, None),
            ("CQ", "Product Service Quantity", "O", 1, None, "0560"),
            ("CP", "Product Service Unit Cost", "O", 1, None, None),
            ("NM", "Number Of Items Per Unit", "O", 1, None, None),
            ("CP", "Product Service Gross Amount", "O", 1, None, None),
            ("CP", "Product Service Billed Amount", "O", 1, None, None),
            ("CWE", "Product Service Clarification Code Type", "O", 0, None, "0561"),
            ("ST", "Product Service Clarification Code Value", "O", 0, None, None),
            ("EI", "Health Document Reference Identifier", "O", 0, None, None),
            ("CWE", "Processing Consideration Code", "O", 0, None, "0562"),
            ("ID", "Restricted Disclosure Indicator", "R", 1, None, "0532"),
            ("CWE", "Related Product Service Code Indicator", "O", 1, None, "0879"),
            ("CP", "Product Service Amount For Physician", "O", 1, None, None),
            ("NM", "Product Service Cost Factor", "O", 1, None, None),
            ("CX", "Cost Center", "O", 1, None, None),
            ("DR", "Billing Period", "O", 1, None, None),
            ("NM", "Days Without Billing", "O", 1, None, None),
            ("NM", "Session No", "O", 1, None, None),
            ("XCN", "Executing Physician ID", "O", 1, None, None),
            ("XCN", "Responsible Physician ID", "O", 1, None, None),
            ("CWE", "Role Executing Physician", "O", 1, None, "0881"),
            ("CWE", "Medical Role Executing Physician", "O", 1, None, "0882"),
            ("CWE", "Side Of Body", "O", 1, None, "0894"),
            ("NM", "Number Of Tp S Pp", "O", 1, None, None),
            ("CP", "Tp Value Pp", "O", 1, None, None),
            ("NM", "Internal Scaling Factor Pp", "O", 1, None, None),
            ("NM", "External Scaling Factor Pp", "O", 1, None, None),
            ("CP", "Amount Pp", "O", 1, None, None),
            ("NM", "Number Of Tp S Technical Part", "O", 1, None, None),
            ("CP", "Tp Value Technical Part", "O", 1, None, None),
            ("NM", "Internal Scaling Factor Technical Part", "O", 1, None, None),
            ("NM", "External Scaling Factor Technical Part", "O", 1, None, None),
            ("CP", "Amount Technical Part", "O", 1, None, None),
            ("CP", "Total Amount Professional Part Technical Part", "O", 1, None, None),
            ("NM", "Vat Rate", "O", 1, None, None),
            ("ID", "Main Service", "O", 1, None, None),
            ("ID", "Validation", "O", 1, None, "0136"),
            ("ST", "Comment", "O", 1, None, None),
        ),
    ),
    "PSS": (
        "Product/Service Section",
        (
            ("EI", "Provider Product Service Section Number", "R", 1, None, None),
            ("EI", "Payer Product Service Section Number", "O", 1, None, None),
            ("SI", "Product Service Section Sequence Number", "R", 1, None, None),
            ("CP", "Billed Amount", "R", 1, None, None),
            ("ST", "Section Description Or Heading", "R", 1, None, None),
        ),
    ),
    "PTH": (
        "Pathway",
        (
            ("ID", "Action Code", "R", 1, None, "0287"),
            ("CWE", "Pathway ID", "R", 1, None, None),
            ("EI", "Pathway Instance ID", "R", 1, None, None),
            ("DTM", "Pathway Established Date Time", "R", 1, None, None),
            ("CWE", "Pathway Life Cycle Status", "O", 1, None, None),
            ("DTM", "Change Pathway Life Cycle Status Date Time", "O", 1, None, None),
            ("CNE", "Mood Code", "O", 1, None, "0725"),
        ),
    ),
    "PV1": (
        "Patient Visit",
        (
            ("SI", "Set ID - PV1", "O", 1, 4, None),
            ("CWE", "Patient Class", "R", 1, None, "0004"),
            ("PL", "Assigned Patient Location", "O", 1, 80, None),
            ("CWE", "Admission Type", "O", 1, None, "0007"),
            ("CX", "Preadmit Number", "O", 1, 250, None),
            ("PL", "Prior Patient Location", "O", 1, 80, None),
            ("XCN", "Attending Doctor", "O", 0, 250, "0010"),
            ("XCN", "Referring Doctor", "O", 0, 250, "0010"),
            ("XCN", "Consulting Doctor", "O", 0, 250, "0010"),
            ("CWE", "Hospital Service", "O", 1, None, "0069"),
            ("PL", "Temporary Location", "O", 1, 80, None),
            ("CWE", "Preadmit Test Indicator", "O", 1, None, "0087"),
            ("CWE", "Re Admission Indicator", "O", 1, None, "0092"),
            ("CWE", "Admit Source", "O", 1, None, "0023"),
            ("CWE", "Ambulatory Status", "O", 0, None, "0009"),
            ("CWE", "Vip Indicator", "O", 1, None, "0099"),
            ("XCN", "Admitting Doctor", "O", 0, 250, "0010"),
            ("CWE", "Patient Type", "O", 1, None, "0018"),
            ("CX", "Visit Number", "O", 1, 250, None),
            ("FC", "Financial Class", "O", 0, 50, "0064"),
            ("CWE", "Charge Price Indicator", "O", 1, None, "0032"),
            ("CWE", "Courtesy Code", "O", 1, None, "0045"),
            ("CWE", "Credit Rating", "O", 1, None, "0046"),
            ("CWE", "Contract Code", "O", 0, None, "0044"),
            ("DT", "Contract Effective Date", "O", 0, 8, None),
            ("NM", "Contract Amount", "O", 0, 12, None),
            ("NM", "Contract Period", "O", 0, 3, None),
            ("CWE", "Interest Code", "O", 1, None, "0073"),
            ("CWE", "Transfer To Bad Debt Code", "O", 1, None, "0110"),
            ("DT", "Transfer to Bad Debt Date", "O", 1, 8, None),
            ("CWE", "Bad Debt Agency Code", "O", 1, None, "0021"),
            ("NM", "Bad Debt Transfer Amount", "O", 1, 12, None),
            ("NM", "Bad Debt Recovery Amount", "O", 1, 12, None),
            ("CWE", "Delete Account Indicator", "O", 1, None, "0111"),
            ("DT", "Delete Account Date", "O", 1, 8, None),
            ("CWE", "Discharge Disposition", "O", 1, None, "0112"),
            ("DLD", "Discharged to Location", "O", 1, 47, "0113"),
            ("CWE", "Diet Type", "O", 1, 250, "0114"),
            ("CWE", "Servicing Facility", "O", 1, None, "0115"),
            ("IS", "Bed Status", "B", 1, 1, "0116"),
            ("CWE", "Account Status", "O", 1, None, "0117"),
            ("PL", "Pending Location", "O", 1, 80, None),
            ("PL", "Prior Temporary Location", "O", 1, 80, None),
            ("DTM", "Admit Date/Time", "O", 1, 26, None),
            ("DTM", "Discharge Date/Time", "O", 1, 26, None),
            ("NM", "Current Patient Balance", "O", 1, 12, None),
            ("NM", "Total Charges", "O", 1, 12, None),
            ("NM", "Total Adjustments", "O", 1, 12, None),
            ("NM", "Total Payments", "O", 1, 12, None),
            ("CX", "Alternate Visit ID", "O", 1, 250, "0203"),
            ("CWE", "Visit Indicator", "O", 1, None, "0326"),
            ("ST", "Service Episode Description", "O", 1, None, None),
            ("CX", "Service Episode Identifier", "O", 1, None, None),
        ),
    ),
    "PV2": (
        "Patient Visit - Additional Information",
        (
            ("PL", "Prior Pending Location", "O", 1, 80, None),
            ("CWE", "Accommodation Code", "O", 1, 250, "0129"),
            ("CWE", "Admit Reason", "O", 1, 250, None),
            ("CWE", "Transfer Reason", "O", 1, 250, None),
            ("ST", "Patient Valuables", "O", 0, 25, None),
            ("ST", "Patient Valuables Location", "O", 1, 25, None),
            ("CWE", "Visit User Code", "O", 0, None, "0130"),
            ("DTM", "Expected Admit Date/Time", "O", 1, 26, None),
            ("DTM", "Expected Discharge Date/Time", "O", 1, 26, None),
            ("NM", "Estimated Length of Inpatient Stay", "O", 1, 3, None),
            ("NM", "Actual Length of Inpatient Stay", "O", 1, 3, None),
            ("ST", "Visit Description", "O", 1, 50, None),
            ("XCN", "Referral Source Code", "O", 0, 250, None),
            ("DT", "Previous Service Date", "O", 1, 8, None),
            ("ID", "Employment Illness Related Indicator", "O", 1, 1, "0136"),
            ("CWE", "Purge Status Code", "O", 1, None, "0213"),
            ("DT", "Purge Status Date", "O", 1, 8, None),
            ("CWE", "Special Program Code", "O", 1, None, "0214"),
            ("ID", "Retention Indicator", "O", 1, 1, "0136"),
            ("NM", "Expected Number of Insurance Plans", "O", 1, 1, None),
            ("CWE", "Visit Publicity Code", "O", 1, None, "0215"),
            ("ID", "Visit Protection Indicator", "O", 1, 1, "0136"),
            ("XON", "Clinic Organization Name", "O", 0, 250, None),
            ("CWE", "Patient Status Code", "O", 1, None, "0216"),
            ("CWE", "Visit Priority Code", "O", 1, None, "0217"),
            ("DT", "Previous Treatment Date", "O", 1, 8, None),
            ("CWE", "Expected Discharge Disposition", "O", 1, None, "0112"),
            ("DT", "Signature on File Date", "O", 1, 8, None),
            ("DT", "First Similar Illness Date", "O", 1, 8, None),
            ("CWE", "Patient Charge Adjustment Code", "O", 1, 250, "0218"),
            ("CWE", "Recurring Service Code", "O", 1, None, "0219"),
            ("ID", "Billing Media Code", "O", 1, 1, "0136"),
            ("DTM", "Expected Surgery Date and Time", "O", 1, 26, None),
            ("ID", "Military Partnership Code", "O", 1, 1, "0136"),
            ("ID", "Military Non-Availability Code", "O", 1, 1, "0136"),
            ("ID", "Newborn Baby Indicator", "O", 1, 1, "0136"),
            ("ID", "Baby Detained Indicator", "O", 1, 1, "0136"),
            ("CWE", "Mode of Arrival Code", "O", 1, 250, "0430"),
            ("CWE", "Recreational Drug Use Code", "O", 0, 250, "0431"),
            ("CWE", "Admission Level of Care Code", "O", 1, 250, "0432"),
            ("CWE", "Precaution Code", "O", 0, 250, "0433"),
            ("CWE", "Patient Condition Code", "O", 1, 250, "0434"),
            ("CWE", "Living Will Code", "O", 1, None, "0315"),
            ("CWE", "Organ Donor Code", "O", 1, None, "0316"),
            ("CWE", "Advance Directive Code", "O", 0, 250, "0435"),
            ("DT", "Patient Status Effective Date", "O", 1, 8, None),
            ("DTM", "Expected LOA Return Date/Time", "O", 1, 26, None),
            ("DTM", "Expected Pre-admission Testing Date/Time", "O", 1, 26, None),
            ("CWE", "Notify Clergy Code", "O", 0, None, "0534"),
            ("DT", "Advance Directive Last Verified Date", "O", 1, None, None),
        ),
    ),
    "PYE": (
        "Payee Information",
        (
            ("SI", "Set ID PYE", "R", 1, None, None),
            ("CWE", "Payee Type", "R", 1, None, "0557"),
            ("CWE", "Payee Relationship To Invoice Patient", "O", 1, None, "0558"),
            ("XON", "Payee Identification List", "O", 0, None, None),
            ("XPN", "Payee Person Name", "O", 0, None, None),
            ("XAD", "Payee Address", "O", 0, None, None),
            ("CWE", "Payment Method", "O", 1, None, "0570"),
        ),
    ),
    "QAK": (
        "Query Acknowledgment",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("ID", "Query Response Status", "O", 1, None, "0208"),
            ("CWE", "Message Query Name", "O", 1, None, "0471"),
            ("NM", "Hit Count Total", "O", 1, None, None),
            ("NM", "This Payload", "O", 1, None, None),
            ("NM", "Hits Remaining", "O", 1, None, None),
        ),
    ),
    "QID": (
        "Query Identification",
        (
            ("ST", "Query Tag", "R", 1, None, None),
            ("CWE", "Message Query Name", "R", 1, None, "0471"),
        ),
    ),
    "QPD": (
        "Query Parameter Definition",
        (
            ("CWE", "Message Query Name", "R", 1, None, "0471"),
            ("ST", "Query Tag", "O", 1, None, None),
            ("varies", "User Parameters In Successive Fields", "O", 1, None, None),
        ),
    ),
    "QRD": ("Original-Style Query Definition", ()),
    "QRF": ("Original Style Query Filter", ()),
    "QRI": (
        "Query Response Instance",
        (
            ("NM", "Candidate Confidence", "O", 1, None, None),
            ("CWE", "Match Reason Code", "O", 0, None, "0392"),
            ("CWE", "Algorithm Descriptor", "O", 1, None, "0393"),
        ),
    ),
    "RCP": (
        "Response Control Parameter",
        (
            ("ID", "Query Priority", "O", 1, None, "0091"),
            ("CQ", "Quantity Limited Request", "O", 1, None, "0126"),
            ("CNE", "Response Modality", "O", 1, None, "0394"),
            ("DTM", "Execution And Delivery Time", "O", 1, None, None),
            ("ID", "Modify Indicator", "O", 1, None, "0395"),
            ("SRT", "Sort By Field", "O", 0, None, None),
            ("ID", "Segment Group Inclusion", "O", 0, None, "0391"),
        ),
    ),
    "RDF": (
        "Table Row Definition",
        (
            ("NM", "Number Of Columns Per Row", "R", 1, None, None),
            ("RCD", "Column Description", "R", 0, None, "0440"),
        ),
    ),
    "RDT": ("Table Row Data", (("varies", "Column Value", "R", 1, None, None),)),
    "REL": (
        "Clinical Relationship Segment",
        (
            ("SI", "Set ID REL", "O", 1, None, None),
            ("CWE", "Relationship Type", "R", 1, None, None),
            ("EI", "This Relationship Instance Identifier", "R", 1, None, None),
            ("EI", "Source Information Instance Identifier", "R", 1, None, None),
            ("EI", "Target Information Instance Identifier", "R", 1, None, None),
            ("EI", "Asserting Entity Instance ID", "O", 1, None, None),
            ("XCN", "Asserting Person", "O", 1, None, None),
            ("XON", "Asserting Organization", "O", 1, None, None),
            ("XAD", "Assertor Address", "O", 1, None, None),
            ("XTN", "Assertor Contact", "O", 1, None, None),
            ("DR", "Assertion Date Range", "O", 1, None, None),
            ("ID", "Negation Indicator", "O", 1, None, "0136"),
            ("CWE", "Certainty Of Relationship", "O", 1, None, None),
            ("NM", "Priority No", "O", 1, None, None),
            (
                "NM",
                "Priority Sequence No Rel Preference For Consideration",
                "O",
                1,
                None,
                None,
            ),
            ("ID", "Separability Indicator", "O", 1, None, "0136"),
        ),
    ),
    "RF1": (
        "Referral Information",
        (
            ("CWE", "Referral Status", "O", 1, None, "0283"),
            ("CWE", "Referral Priority", "O", 1, None, "0280"),
            ("CWE", "Referral Type", "O", 1, None, "0281"),
            ("CWE", "Referral Disposition", "O", 0, None, "0282"),
            ("CWE", "Referral Category", "O", 1, None, "0284"),
            ("EI", "Originating Referral Identifier", "R", 1, None, None),
            ("DTM", "Effective Date", "O", 1, None, None),
            ("DTM", "Expiration Date", "O", 1, None, None),
            ("DTM", "Process Date", "O", 1, None, None),
            ("CWE", "Referral Reason", "O", 0, None, "0336"),
            ("EI", "External Referral Identifier", "O", 0, None, None),
            ("CWE", "Referral Documentation Completion Status", "O", 1, None, "0865"),
        ),
    ),
    "RFI": (
        "Request for Information",
        (
            ("DTM", "Request Date", "R", 1, None, None),
            ("DTM", "Response Due Date", "R", 1, None, None),
            ("ID", "Patient Consent", "O", 1, None, "0136"),
            ("DTM", "Date Additional Information Was Submitted", "O", 1, None, None),
        ),
    ),
    "RGS": (
        "Resource Group",
        (
            ("SI", "Set ID RGS", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("CWE", "Resource Group ID", "O", 1, None, None),
        ),
    ),
    "RMI": (
        "Risk Management Incident",
        (
            ("CWE", "Risk Management Incident Code", "O", 1, None, "0427"),
            ("DTM", "Date Time Incident", "O", 1, None, None),
            ("CWE", "Incident Type Code", "O", 1, None, "0428"),
        ),
    ),
    "ROL": (
        "Role",
        (
            ("EI", "Role Instance ID", "O", 1, 60, None),
            ("ID", "Action Code", "R", 1, 2, "0287"),
            ("CWE", "Role-ROL", "R", 1, 250, "0443"),
            ("XCN", "Role Person", "R", 0, 250, None),
            ("DTM", "Role Begin Date/Time", "O", 1, 26, None),
            ("DTM", "Role End Date/Time", "O", 1, 26, None),
            ("CWE", "Role Duration", "O", 1, 250, None),
            ("CWE", "Role Action Reason", "O", 1, 250, None),
            ("CWE", "Provider Type", "O", 0, 250, None),
            ("CWE", "Organization Unit Type", "O", 1, 250, "0406"),
            ("XAD", "Office/Home Address/Birthplace", "O", 0, 250, None),
            ("XTN", "Phone", "O", 0, 250, None),
            ("PL", "Person S Location", "O", 1, None, None),
            ("XON", "Organization", "O", 1, None, None),
        ),
    ),
    "RQ1": (
        "Requisition Detail-1",
        (
            ("ST", "Anticipated Price", "O", 1, None, None),
            ("CWE", "Manufacturer Identifier", "O", 1, None, "0385"),
            ("ST", "Manufacturer S Catalog", "O", 1, None, None),
            ("CWE", "Vendor ID", "O", 1, None, "9999"),
            ("ST", "Vendor Catalog", "O", 1, None, None),
            ("ID", "Taxable", "O", 1, None, "0136"),
            ("ID", "Substitute Allowed", "O", 1, None, "0136"),
        ),
    ),
    "RQD": (
        "Requisition Detail",
        (
            ("SI", "Requisition Line Number", "O", 1, None, None),
            ("CWE", "Item Code Internal", "O", 1, None, "9999"),
            ("CWE", "Item Code External", "O", 1, None, "9999"),
            ("CWE", "Hospital Item Code", "O", 1, None, "9999"),
            ("NM", "Requisition Quantity", "O", 1, None, None),
            ("CWE", "Requisition Unit Of Measure", "O", 1, None, "9999"),
            ("CX", "Cost Center Account Number", "O", 1, None, "0319"),
            ("CWE", "Item Natural Account Code", "O", 1, None, "0320"),
            ("CWE", "Deliver To ID", "O", 1, None, "9999"),
            ("DT", "Date Needed", "O", 1, None, None),
        ),
    ),
    "RXA": (
        "Pharmacy/Treatment Administration",
        (
            ("NM", "Give Sub ID Counter", "R", 1, None, None),
            ("NM", "Administration Sub ID Counter", "R", 1, None, None),
            ("DTM", "Date Time Start Of Administration", "R", 1, None, None),
            ("DTM", "Date Time End Of Administration", "R", 1, None, None),
            ("CWE", "Administered Code", "R", 1, None, "0292"),
            ("NM", "Administered Amount", "R", 1, None, None),
            ("CWE", "Administered Units", "O", 1, None, "9999"),
            ("CWE", "Administered Dosage Form", "O", 1, None, "9999"),
            ("CWE", "Administration Notes", "O", 0, None, "9999"),
            ("XCN", "Administering Provider", "O", 0, None, None),
            ("LA2", "Administered At Location", "O", 1, None, None),
            ("ST", "Administered Per Time Unit", "O", 1, None, None),
            ("NM", "Administered Strength", "O", 1, None, None),
            ("CWE", "Administered Strength Units", "O", 1, None, "9999"),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("DTM", "Substance Expiration Date", "O", 0, None, None),
            ("CWE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CWE", "Substance Treatment Refusal Reason", "O", 0, None, "9999"),
            ("CWE", "Indication", "O", 0, None, "9999"),
            ("ID", "Completion Status", "O", 1, None, "0322"),
            ("ID", "Action Code RXA", "O", 1, None, "0206"),
            ("DTM", "System Entry Date Time", "O", 1, None, None),
            ("NM", "Administered Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Administered Drug Strength Volume Units", "O", 1, None, "9999"),
            ("CWE", "Administered Barcode Identifier", "O", 1, None, "9999"),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("PL", "Administer At", "O", 1, None, None),
            ("XAD", "Administered At Address", "O", 1, None, None),
        ),
    ),
    "RXC": (
        "Pharmacy/Treatment Component Order",
        (
            ("ID", "Rx Component Type", "R", 1, None, "0166"),
            ("CWE", "Component Code", "R", 1, None, "9999"),
            ("NM", "Component Amount", "R", 1, None, None),
            ("CWE", "Component Units", "R", 1, None, "9999"),
            ("NM", "Component Strength", "O", 1, None, None),
            ("CWE", "Component Strength Units", "O", 1, None, "9999"),
            ("CWE", "Supplementary Code", "O", 0, None, "9999"),
            ("NM", "Component Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Component Drug Strength Volume Units", "O", 1, None, "9999"),
        ),
    ),
    "RXD": (
        "Pharmacy/Treatment Dispense",
        (
            ("NM", "Dispense Sub ID Counter", "R", 1, None, None),
            ("CWE", "Dispense Give Code", "R", 1, None, "0292"),
            ("DTM", "Date Time Dispensed", "R", 1, None, None),
            ("NM", "Actual Dispense Amount", "R", 1, None, None),
            ("CWE", "Actual Dispense Units", "O", 1, None, "9999"),
            ("CWE", "Actual Dosage Form", "O", 1, None, "9999"),
            ("ST", "Prescription Number", "R", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("ST", "Dispense Notes", "O", 0, None, None),
            ("XCN", "Dispensing Provider", "O", 0, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("LA2", "Dispense To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CWE",
                "Pharmacy Treatment Supplier S Special Dispensing Instructions",
                "O",
                0,
                None,
                "9999",
            ),
            ("NM", "Actual Strength", "O", 1, None, None),
            ("CWE", "Actual Strength Unit", "O", 1, None, "9999"),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("DTM", "Substance Expiration Date", "O", 0, None, None),
            ("CWE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CWE", "Indication", "O", 0, None, "9999"),
            ("NM", "Dispense Package Size", "O", 1, None, None),
            ("CWE", "Dispense Package Size Unit", "O", 1, None, "9999"),
            ("ID", "Dispense Package Method", "O", 1, None, "0321"),
            ("CWE", "Supplementary Code", "O", 0, None, "9999"),
            ("CWE", "Initiating Location", "O", 1, None, "9999"),
            ("CWE", "Packaging Assembly Location", "O", 1, None, "9999"),
            ("NM", "Actual Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Actual Drug Strength Volume Units", "O", 1, None, "9999"),
            ("CWE", "Dispense To Pharmacy", "O", 1, None, "9999"),
            ("XAD", "Dispense To Pharmacy Address", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("CWE", "Dispense Type", "O", 1, None, "0484"),
            ("XTN", "Pharmacy Phone Number", "O", 0, None, None),
        ),
    ),
    "RXE": (
        "Pharmacy/Treatment Encoded Order",
        (
            ("WD", "Quantity Timing", "B", 1, None, None),
            ("CWE", "Give Code", "R", 1, None, "0292"),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CWE", "Give Units", "R", 1, None, "9999"),
            ("CWE", "Give Dosage Form", "O", 1, None, "9999"),
            ("CWE", "Provider S Administration Instructions", "O", 0, None, "9999"),
            ("WD", "Deliver To Location", "B", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("NM", "Dispense Amount", "O", 1, None, None),
            ("CWE", "Dispense Units", "O", 1, None, "9999"),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("XCN", "Ordering Provider S DEA Number", "O", 0, None, None),
            ("XCN", "Pharmacist Treatment Supplier S Verifier ID", "O", 0, None, None),
            ("ST", "Prescription Number", "O", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("NM", "Number Of Refills Doses Dispensed", "O", 1, None, None),
            ("DTM", "D T Of Most Recent Refill Or Dose Dispensed", "O", 1, None, None),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CWE",
                "Pharmacy Treatment Supplier S Special Dispensing Instructions",
                "O",
                0,
                None,
                "9999",
            ),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("ST", "Give Rate Amount", "O", 1, None, None),
            ("CWE", "Give Rate Units", "O", 1, None, "9999"),
            ("NM", "Give Strength", "O", 1, None, None),
            ("CWE", "Give Strength Units", "O", 1, None, "9999"),
            ("CWE", "Give Indication", "O", 0, None, "9999"),
            ("NM", "Dispense Package Size", "O", 1, None, None),
            ("CWE", "Dispense Package Size Unit", "O", 1, None, "9999"),
            ("ID", "Dispense Package Method", "O", 1, None, "0321"),
            ("CWE", "Supplementary Code", "O", 0, None, "9999"),
            ("DTM", "Original Order Date Time", "O", 1, None, None),
            ("NM", "Give Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Give Drug Strength Volume Units", "O", 1, None, "9999"),
            ("CWE", "Controlled Substance Schedule", "O", 1, None, "0477"),
            ("ID", "Formulary Status", "O", 1, None, "0478"),
            ("CWE", "Pharmaceutical Substance Alternative", "O", 0, None, "9999"),
            ("CWE", "Pharmacy Of Most Recent Fill", "O", 1, None, "9999"),
            ("NM", "Initial Dispense Amount", "O", 1, None, None),
            ("CWE", "Dispensing Pharmacy", "O", 1, None, "9999"),
            ("XAD", "Dispensing Pharmacy Address", "O", 1, None, None),
            ("PL", "Deliver To Patient Location", "O", 1, None, None),
            ("XAD", "Deliver To Address", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("XTN", "Pharmacy Phone Number", "O", 0, None, None),
        ),
    ),
    "RXG": (
        "Pharmacy/Treatment Give",
        (
            ("NM", "Give Sub ID Counter", "R", 1, None, None),
            ("NM", "Dispense Sub ID Counter", "O", 1, None, None),
            ("WD", "Quantity Timing", "B", 1, None, None),
            ("CWE", "Give Code", "R", 1, None, "0292"),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CWE", "Give Units", "R", 1, None, "9999"),
            ("CWE", "Give Dosage Form", "O", 1, None, "9999"),
            ("CWE", "Administration Notes", "O", 0, None, "9999"),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("LA2", "Dispense To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CWE",
                "Pharmacy Treatment Supplier S Special Administration Instructions",
                "O",
                0,
                None,
                "9999",
            ),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("ST", "Give Rate Amount", "O", 1, None, None),
            ("CWE", "Give Rate Units", "O", 1, None, "9999"),
            ("NM", "Give Strength", "O", 1, None, None),
            ("CWE", "Give Strength Units", "O", 1, None, "9999"),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("DTM", "Substance Expiration Date", "O", 0, None, None),
            ("CWE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CWE", "Indication", "O", 0, None, "9999"),
            ("NM", "Give Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Give Drug Strength Volume Units", "O", 1, None, "9999"),
            ("CWE", "Give Barcode Identifier", "O", 1, None, "9999"),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("CWE", "Dispense To Pharmacy", "O", 1, None, "9999"),
            ("XAD", "Dispense To Pharmacy Address", "O", 1, None, None),
            ("PL", "Deliver To Patient Location", "O", 1, None, None),
            ("XAD", "Deliver To Address", "O", 1, None, None),
        ),
    ),
    "RXO": (
        "Pharmacy/Treatment Order",
        (
            ("CWE", "Requested Give Code", "O", 1, None, "9999"),
            ("NM", "Requested Give Amount Minimum", "O", 1, None, None),
            ("NM", "Requested Give Amount Maximum", "O", 1, None, None),
            ("CWE", "Requested Give Units", "O", 1, None, "9999"),
            ("CWE", "Requested Dosage Form", "O", 1, None, "9999"),
            ("CWE", "Provider S Pharmacy Treatment Instructions", "O", 0, None, "9999"),
            ("CWE", "Provider S Administration Instructions", "O", 0, None, "9999"),
            ("LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Allow Substitutions", "O", 1, None, "0161"),
            ("CWE", "Requested Dispense Code", "O", 1, None, "9999"),
            ("NM", "Requested Dispense Amount", "O", 1, None, None),
            ("CWE", "Requested Dispense Units", "O", 1, None, "9999"),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("XCN", "Ordering Provider S DEA Number", "O", 0, None, None),
            ("XCN", "Pharmacist Treatment Supplier S Verifier ID", "O", 0, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            ("ST", "Requested Give Per Time Unit", "O", 1, None, None),
            ("NM", "Requested Give Strength", "O", 1, None, None),
            ("CWE", "Requested Give Strength Units", "O", 1, None, "9999"),
            ("CWE", "Indication", "O", 0, None, "9999"),
            ("ST", "Requested Give Rate Amount", "O", 1, None, None),
            ("CWE", "Requested Give Rate Units", "O", 1, None, "9999"),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("CWE", "Supplementary Code", "O", 0, None, "9999"),
            ("NM", "Requested Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Requested Drug Strength Volume Units", "O", 1, None, "9999"),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("NM", "Dispensing Interval", "O", 1, None, None),
            ("EI", "Medication Instance Identifier", "O", 1, None, None),
            ("EI", "Segment Instance Identifier", "O", 1, None, None),
            ("CNE", "Mood Code", "O", 1, None, "0725"),
            ("CWE", "Dispensing Pharmacy", "O", 1, None, "9999"),
            ("XAD", "Dispensing Pharmacy Address", "O", 1, None, None),
            ("PL", "Deliver To Patient Location", "O", 1, None, None),
            ("XAD", "Deliver To Address", "O", 1, None, None),
            ("XTN", "Pharmacy Phone Number", "O", 0, None, None),
        ),
    ),
    "RXR": (
        "Pharmacy/Treatment Route",
        (
            ("CWE", "Route", "R", 1, None, "0162"),
            ("CWE", "Administration Site", "O", 1, None, "0550"),
            ("CWE", "Administration Device", "O", 1, None, "0164"),
            ("CWE", "Administration Method", "O", 1, None, "0165"),
            ("CWE", "Routing Instruction", "O", 1, None, "9999"),
            ("CWE", "Administration Site Modifier", "O", 1, None, "0495"),
        ),
    ),
    "SAC": (
        "Specimen Container Detail",
        (
            ("EI", "External Accession Identifier", "O", 1, None, None),
            ("EI", "Accession Identifier", "O", 1, None, None),
            ("EI", "Container Identifier", "O", 1, None, None),
            ("EI", "Primary Parent Container Identifier", "O", 1, None, None),
            ("EI", "Equipment Container Identifier", "O", 1, None, None),
            ("WD", "Specimen Source", "B", 1, None, None),
            ("DTM", "Registration Date Time", "O", 1, None, None),
            ("CWE", "Container Status", "O", 1, None, "0370"),
            ("CWE", "Carrier Type", "O", 1, None, "0378"),
            ("EI", "Carrier Identifier", "O", 1, None, None),
            ("NA", "Position In Carrier", "O", 1, None, None),
            ("CWE", "Tray Type SAC", "O", 1, None, "0379"),
            ("EI", "Tray Identifier", "O", 1, None, None),
            ("NA", "Position In Tray", "O", 1, None, None),
            ("CWE", "Location", "O", 0, None, "9999"),
            ("NM", "Container Height", "O", 1, None, None),
            ("NM", "Container Diameter", "O", 1, None, None),
            ("NM", "Barrier Delta", "O", 1, None, None),
            ("NM", "Bottom Delta", "O", 1, None, None),
            ("CWE", "Container Height Diameter Delta Units", "O", 1, None, "9999"),
            ("NM", "Container Volume", "O", 1, None, None),
            ("NM", "Available Specimen Volume", "O", 1, None, None),
            ("NM", "Initial Specimen Volume", "O", 1, None, None),
            ("CWE", "Volume Units", "O", 1, None, "9999"),
            ("CWE", "Separator Type", "O", 1, None, "0380"),
            ("CWE", "Cap Type", "O", 1, None, "0381"),
            ("CWE", "Additive", "O", 0, None, "0371"),
            ("CWE", "Specimen Component", "O", 1, None, "0372"),
            ("SN", "Dilution Factor", "O", 1, None, None),
            ("CWE", "Treatment", "O", 1, None, "0373"),
            ("SN", "Temperature", "O", 1, None, None),
            ("NM", "Hemolysis Index", "O", 1, None, None),
            ("CWE", "Hemolysis Index Units", "O", 1, None, "9999"),
            ("NM", "Lipemia Index", "O", 1, None, None),
            ("CWE", "Lipemia Index Units", "O", 1, None, "9999"),
            ("NM", "Icterus Index", "O", 1, None, None),
            ("CWE", "Icterus Index Units", "O", 1, None, "9999"),
            ("NM", "Fibrin Index", "O", 1, None, None),
            ("CWE", "Fibrin Index Units", "O", 1, None, "9999"),
            ("CWE", "System Induced Contaminants", "O", 0, None, "0374"),
            ("CWE", "Drug Interference", "O", 0, None, "0382"),
            ("CWE", "Artificial Blood", "O", 1, None, "0375"),
            ("CWE", "Special Handling Code", "O", 0, None, "0376"),
            ("CWE", "Other Environmental Factors", "O", 0, None, "0377"),
        ),
    ),
    "SCD": (
        "Anti-Microbial Cycle Data",
        (
            ("TM", "Cycle Start Time", "O", 1, None, None),
            ("NM", "Cycle Count", "O", 1, None, None),
            ("CQ", "Temp Max", "O", 1, None, None),
            ("CQ", "Temp Min", "O", 1, None, None),
            ("NM", "Load Number", "O", 1, None, None),
            ("CQ", "Condition Time", "O", 1, None, None),
            ("CQ", "Sterilize Time", "O", 1, None, None),
            ("CQ", "Exhaust Time", "O", 1, None, None),
            ("CQ", "Total Cycle Time", "O", 1, None, None),
            ("CWE", "Device Status", "O", 1, None, "0682"),
            ("DTM", "Cycle Start Date Time", "O", 1, None, None),
            ("CQ", "Dry Time", "O", 1, None, None),
            ("CQ", "Leak Rate", "O", 1, None, None),
            ("CQ", "Control Temperature", "O", 1, None, None),
            ("CQ", "Sterilizer Temperature", "O", 1, None, None),
            ("TM", "Cycle Complete Time", "O", 1, None, None),
            ("CQ", "Under Temperature", "O", 1, None, None),
            ("CQ", "Over Temperature", "O", 1, None, None),
            ("CNE", "Abort Cycle", "O", 1, None, "0532"),
            ("CNE", "Alarm", "O", 1, None, "0532"),
            ("CNE", "Long In Charge Phase", "O", 1, None, "0532"),
            ("CNE", "Long In Exhaust Phase", "O", 1, None, "0532"),
            ("CNE", "Long In Fast Exhaust Phase", "O", 1, None, "0532"),
            ("CNE", "Reset", "O", 1, None, "0532"),
            ("XCN", "Operator Unload", "O", 1, None, None),
            ("CNE", "Door Open", "O", 1, None, "0532"),
            ("CNE", "Reading Failure", "O", 1, None, "0532"),
            ("CWE", "Cycle Type", "O", 1, None, "0702"),
            ("CQ", "Thermal Rinse Time", "O", 1, None, None),
            ("CQ", "Wash Time", "O", 1, None, None),
            ("CQ", "Injection Rate", "O", 1, None, None),
            ("CNE", "Procedure Code", "O", 1, None, "0088"),
            ("CX", "Patient Identifier List", "O", 0, None, None),
            ("XCN", "Attending Doctor", "O", 1, None, "0010"),
            ("SN", "Dilution Factor", "O", 1, None, None),
            ("CQ", "Fill Time", "O", 1, None, None),
            ("CQ", "Inlet Temperature", "O", 1, None, None),
        ),
    ),
    "SCH": (
        "Scheduling Activity Information",
        (
            ("EI", "Placer Appointment ID", "O", 1, None, None),
            ("EI", "Filler Appointment ID", "O", 1, None, None),
            ("NM", "Occurrence Number", "O", 1, None, None),
            ("EI", "Placer Group Number", "O", 1, None, None),
            ("CWE", "Schedule ID", "O", 1, None, None),
            ("CWE", "Event Reason", "R", 1, None, None),
            ("CWE", "Appointment Reason", "O", 1, None, "0276"),
            ("CWE", "Appointment Type", "O", 1, None, "0277"),
            ("WD", "Appointment Duration", "B", 1, None, None),
            ("CNE", "Appointment Duration Units", "O", 1, None, None),
            ("XCN", "Placer Contact Person", "O", 0, None, None),
            ("XTN", "Placer Contact Phone Number", "O", 1, None, None),
            ("XAD", "Placer Contact Address", "O", 0, None, None),
            ("PL", "Placer Contact Location", "O", 1, None, None),
            ("XCN", "Filler Contact Person", "R", 0, None, None),
            ("XTN", "Filler Contact Phone Number", "O", 1, None, None),
            ("XAD", "Filler Contact Address", "O", 0, None, None),
            ("PL", "Filler Contact Location", "O", 1, None, None),
            ("XCN", "Entered By Person", "R", 0, None, None),
            ("XTN", "Entered By Phone Number", "O", 0, None, None),
            ("PL", "Entered By Location", "O", 1, None, None),
            ("EI", "Parent Placer Appointment ID", "O", 1, None, None),
            ("EI", "Parent Filler Appointment ID", "O", 1, None, None),
            ("CWE", "Filler Status Code", "O", 1, None, "0278"),
            ("EI", "Placer Order Number", "O", 0, None, None),
            ("EI", "Filler Order Number", "O", 0, None, None),
        ),
    ),
    "SCP": (
        "Sterilizer Configuration (Anti-Microbial Devices)",
        (
            (
                "NM",
                "Number Of Decontamination Sterilization Devices",
                "O",
                1,
                None,
                None,
            ),
            ("CWE", "Labor Calculation Type", "O", 1, None, "0651"),
            ("CWE", "Date Format", "O", 1, None, "0653"),
            ("EI", "Device Number", "O", 1, None, None),
            ("ST", "Device Name", "O", 1, None, None),
            ("ST", "Device Model Name", "O", 1, None, None),
            ("CWE", "Device Type", "O", 1, None, "0657"),
            ("CWE", "Lot Control", "O", 1, None, "0659"),
        ),
    ),
    "SDD": (
        "Sterilization Device Data",
        (
            ("EI", "Lot Number", "O", 1, None, None),
            ("EI", "Device Number", "O", 1, None, None),
            ("ST", "Device Name", "O", 1, None, None),
            ("CWE", "Device Data State", "O", 1, None, "0667"),
            ("CWE", "Load Status", "O", 1, None, "0669"),
            ("NM", "Control Code", "O", 1, None, None),
            ("ST", "Operator Name", "O", 1, None, None),
        ),
    ),
    "SFT": (
        "Software Segment",
        (
            ("XON", "Software Vendor Organization", "R", 1, 567, None),
            ("ST", "Software Certified Version or Release Number", "R", 1, 15, None),
            ("ST", "Software Product Name", "R", 1, 20, None),
            ("ST", "Software Binary ID", "R", 1, 20, None),
            ("TX", "Software Product Information", "O", 1, 1024, None),
            ("DTM", "Software Install Date", "O", 1, 26, None),
        ),
    ),
    "SHP": (
        "Shipment",
        (
            ("EI", "Shipment ID", "R", 0, None, None),
            ("EI", "Internal Shipment ID", "O", 0, None, None),
            ("CWE", "Shipment Status", "O", 0, None, "0905"),
            ("DTM", "Shipment Status Date Time", "R", 0, None, None),
            ("TX", "Shipment Status Reason", "O", 0, None, None),
            ("CWE", "Shipment Priority", "O", 0, None, "0906"),
            ("CWE", "Shipment Confidentiality", "O", 0, None, "0907"),
            ("NM", "Number Of Packages In Shipment", "O", 0, None, None),
            ("CWE", "Shipment Condition", "O", 0, None, "0544"),
            ("CWE", "Shipment Handling Code", "O", 0, None, "0376"),
            ("CWE", "Shipment Risk Code", "O", 0, None, "0489"),
        ),
    ),
    "SID": (
        "Substance Identifier",
        (
            ("CWE", "Application Method Identifier", "O", 1, None, "9999"),
            ("ST", "Substance Lot Number", "O", 1, None, None),
            ("ST", "Substance Container Identifier", "O", 1, None, None),
            ("CWE", "Substance Manufacturer Identifier", "O", 1, None, "0385"),
        ),
    ),
    "SLT": (
        "Sterilization Lot",
        (
            ("EI", "Device Number", "O", 1, None, None),
            ("ST", "Device Name", "O", 1, None, None),
            ("EI", "Lot Number", "O", 1, None, None),
            ("EI", "Item Identifier", "O", 1, None, None),
            ("ST", "Bar Code", "O", 1, None, None),
        ),
    ),
    "SPM": (
        "Specimen",
        (
            ("SI", "Set ID - SPM", "O", 1, 4, None),
            ("EIP", "Specimen ID", "O", 1, 80, None),
            ("EIP", "Specimen Parent IDs", "O", 0, 80, None),
            ("CWE", "Specimen Type", "R", 1, 250, "0487"),
            ("CWE", "Specimen Type Modifier", "O", 0, 250, "0541"),
            ("CWE", "Specimen Additives", "O", 0, 250, "0371"),
            ("CWE", "Specimen Collection Method", "O", 1, 250, "0488"),
            ("CWE", "Specimen Source Site", "O", 1, 250, "9999"),
            ("CWE", "Specimen Source Site Modifier", "O", 0, 250, "0542"),
            ("CWE", "Specimen Collection Site", "O", 1, 250, "0543"),
            ("CWE", "Specimen Role", "O", 0, 250, "0369"),
            ("CQ", "Specimen Collection Amount", "O", 1, 20, None),
            ("NM", "Grouped Specimen Count", "O", 1, 6, None),
            ("ST", "Specimen Description", "O", 0, 250, None),
            ("CWE", "Specimen Handling Code", "O", 0, 250, "0376"),
            ("CWE", "Specimen Risk Code", "O", 0, 250, "0489"),
            ("DR", "Specimen Collection Date/Time", "O", 1, 26, None),
            ("DTM", "Specimen Received Date/Time", "O", 1, 26, None),
            ("DTM", "Specimen Expiration Date/Time", "O", 1, 26, None),
            ("ID", "Specimen Availability", "O", 1, 1, "0136"),
            ("CWE", "Specimen Reject Reason", "O", 0, 250, "0490"),
            ("CWE", "Specimen Quality", "O", 1, 250, "0491"),
            ("CWE", "Specimen Appropriateness", "O", 1, 250, "0492"),
            ("CWE", "Specimen Condition", "O", 0, 250, "0493"),
            ("CQ", "Specimen Current Quantity", "O", 1, 20, None),
            ("NM", "Number of Specimen Containers", "O", 1, 4, None),
            ("CWE", "Container Type", "O", 1, 250, "9999"),
            ("CWE", "Container Condition", "O", 1, 250, "0544"),
            ("CWE", "Specimen Child Role", "O", 1, 250, "0494"),
            ("CX", "Accession ID", "O", 0, None, None),
            ("CX", "Other Specimen ID", "O", 0, None, None),
            ("EI", "Shipment ID", "O", 0, None, None),
        ),
    ),
    "STF": (
        "Staff Identification",
        (
            ("CWE", "Primary Key Value STF", "O", 1, None, "9999"),
            ("CX", "Staff Identifier List", "O", 0, None, "0061"),
            ("XPN", "Staff Name", "O", 0, None, None),
            ("CWE", "Staff Type", "O", 0, None, "0182"),
            ("CWE", "Administrative Sex", "O", 1, None, "0001"),
            ("DTM", "Date Time Of Birth", "O", 1, None, None),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("CWE", "Department", "O", 0, None, "0184"),
            ("CWE", "Hospital Service STF", "O", 0, None, "0069"),
            ("XTN", "Phone", "O", 0, None, None),
            ("XAD", "Office Home Address Birthplace", "O", 0, None, None),
            ("DIN", "Institution Activation Date", "O", 0, None, "0537"),
            ("DIN", "Institution Inactivation Date", "O", 0, None, "0537"),
            ("CWE", "Backup Person ID", "O", 0, None, None),
            ("ST", "E Mail Address", "O", 0, None, None),
            ("CWE", "Preferred Method Of Contact", "O", 1, None, "0185"),
            ("CWE", "Marital Status", "O", 1, None, "0002"),
            ("ST", "Job Title", "O", 1, None, None),
            ("JCC", "Job Code Class", "O", 1, None, "0327"),
            ("CWE", "Employment Status Code", "O", 1, None, "0066"),
            ("ID", "Additional Insured On Auto", "O", 1, None, "0136"),
            ("DLN", "Driver S License Number Staff", "O", 1, None, None),
            ("ID", "Copy Auto Ins", "O", 1, None, "0136"),
            ("DT", "Auto Ins Expires", "O", 1, None, None),
            ("DT", "Date Last Dmv Review", "O", 1, None, None),
            ("DT", "Date Next Dmv Review", "O", 1, None, None),
            ("CWE", "Race", "O", 1, None, "0005"),
            ("CWE", "Ethnic Group", "O", 1, None, "0189"),
            ("ID", "Re Activation Approval Indicator", "O", 1, None, "0136"),
            ("CWE", "Citizenship", "O", 0, None, "0171"),
            ("DTM", "Date Time Of Death", "O", 1, None, None),
            ("ID", "Death Indicator", "O", 1, None, "0136"),
            ("CWE", "Institution Relationship Type Code", "O", 1, None, "0538"),
            ("DR", "Institution Relationship Period", "O", 1, None, None),
            ("DT", "Expected Return Date", "O", 1, None, None),
            ("CWE", "Cost Center Code", "O", 0, None, "0539"),
            ("ID", "Generic Classification Indicator", "O", 1, None, "0136"),
            ("CWE", "Inactive Reason Code", "O", 1, None, "0540"),
            ("CWE", "Generic Resource Type Or Category", "O", 0, None, "0771"),
            ("CWE", "Religion", "O", 1, None, "0006"),
            ("ED", "Signature", "O", 1, None, None),
        ),
    ),
    "STZ": (
        "Sterilization Parameter",
        (
            ("CWE", "Sterilization Type", "O", 1, None, "0806"),
            ("CWE", "Sterilization Cycle", "O", 1, None, "0702"),
            ("CWE", "Maintenance Cycle", "O", 1, None, "0809"),
            ("CWE", "Maintenance Type", "O", 1, None, "0811"),
        ),
    ),
    "TCC": (
        "Test Code Configuration",
        (
            ("CWE", "Universal Service Identifier", "R", 1, None, None),
            ("EI", "Equipment Test Application Identifier", "R", 1, None, None),
            ("WD", "Specimen Source", "B", 1, None, None),
            ("SN", "Auto Dilution Factor Default", "O", 1, None, None),
            ("SN", "Rerun Dilution Factor Default", "O", 1, None, None),
            ("SN", "Pre Dilution Factor Default", "O", 1, None, None),
            ("SN", "Endogenous Content Of Pre Dilution Diluent", "O", 1, None, None),
            ("NM", "Inventory Limits Warning Level", "O", 1, None, None),
            ("ID", "Automatic Rerun Allowed", "O", 1, None, "0136"),
            ("ID", "Automatic Repeat Allowed", "O", 1, None, "0136"),
            ("ID", "Automatic Reflex Allowed", "O", 1, None, "0136"),
            ("SN", "Equipment Dynamic Range", "O", 1, None, None),
            ("CWE", "Units", "O", 1, None, "9999"),
            ("CWE", "Processing Type", "O", 1, None, "0388"),
        ),
    ),
    "TCD": (
        "Test Code Detail",
        (
            ("CWE", "Universal Service Identifier", "R", 1, None, None),
            ("SN", "Auto Dilution Factor", "O", 1, None, None),
            ("SN", "Rerun Dilution Factor", "O", 1, None, None),
            ("SN", "Pre Dilution Factor", "O", 1, None, None),
            ("SN", "Endogenous Content Of Pre Dilution Diluent", "O", 1, None, None),
            ("ID", "Automatic Repeat Allowed", "O", 1, None, "0136"),
            ("ID", "Reflex Allowed", "O", 1, None, "0136"),
            ("CWE", "Analyte Repeat Status", "O", 1, None, "0389"),
        ),
    ),
    "TQ1": (
        "Timing/Quantity",
        (
            ("SI", "Set ID - TQ1", "O", 1, 4, None),
            ("CQ", "Quantity", "O", 1, 20, None),
            ("RPT", "Repeat Pattern", "O", 0, 540, "0335"),
            ("TM", "Explicit Time", "O", 0, 20, None),
            ("CQ", "Relative Time and Units", "O", 0, 20, None),
            ("CQ", "Service Duration", "O", 1, 20, None),
            ("DTM", "Start date/time", "O", 1, 26, None),
            ("DTM", "End date/time", "O", 1, 26, None),
            ("CWE", "Priority", "O", 0, 250, "0485"),
            ("TX", "Condition text", "O", 1, 250, None),
            ("TX", "Text instruction", "O", 1, 250, None),
            ("ID", "Conjunction", "O", 1, 10, "0472"),
            ("CQ", "Occurrence duration", "O", 1, 20, None),
            ("NM", "Total occurrence's", "O", 1, 10, None),
        ),
    ),
    "TQ2": (
        "Timing/Quantity Relationship",
        (
            ("SI", "Set ID - TQ2", "O", 1, 4, None),
            ("ID", "Sequence/Results Flag", "O", 1, 1, "0503"),
            ("EI", "Related Placer Number", "O", 0, 22, None),
            ("EI", "Related Filler Number", "O", 0, 22, None),
            ("EI", "Related Placer Group Number", "O", 0, 22, None),
            ("ID", "Sequence Condition Code", "O", 1, 2, "0504"),
            ("ID", "Cyclic Entry/Exit Indicator", "O", 1, 1, "0505"),
            ("CQ", "Sequence Condition Time Interval", "O", 1, 20, None),
            ("NM", "Cyclic Group Maximum Number of Repeats", "O", 1, 10, None),
            ("ID", "Special Service Request Relationship", "O", 1, 1, "0506"),
        ),
    ),
    "TXA": (
        "Transcription Document Header",
        (
            ("SI", "Set ID TXA", "R", 1, None, None),
            ("CWE", "Document Type", "R", 1, None, "0270"),
            ("ID", "Document Content Presentation", "O", 1, None, "0191"),
            ("DTM", "Activity Date Time", "O", 1, None, None),
            ("XCN", "Primary Activity Provider Code Name", "O", 0, None, None),
            ("DTM", "Origination Date Time", "O", 1, None, None),
            ("DTM", "Transcription Date Time", "O", 1, None, None),
            ("DTM", "Edit Date Time", "O", 0, None, None),
            ("XCN", "Originator Code Name", "O", 0, None, None),
            ("XCN", "Assigned Document Authenticator", "O", 0, None, None),
            ("XCN", "Transcriptionist Code Name", "O", 0, None, None),
            ("EI", "Unique Document Number", "R", 1, None, None),
            ("EI", "Parent Document Number", "O", 1, None, None),
            ("EI", "Placer Order Number", "O", 0, None, None),
            ("EI", "Filler Order Number", "O", 1, None, None),
            ("ST", "Unique Document File Name", "O", 1, None, None),
            ("ID", "Document Completion Status", "R", 1, None, "0271"),
            ("ID", "Document Confidentiality Status", "O", 1, None, "0272"),
            ("ID", "Document Availability Status", "O", 1, None, "0273"),
            ("ID", "Document Storage Status", "O", 1, None, "0275"),
            ("ST", "Document Change Reason", "O", 1, None, None),
            ("PPN", "Authentication Person Time Stamp Set", "O", 0, None, None),
            (
                "XCN",
                "Distributed Copies Code And Name Of Recipient S",
                "O",
                0,
                None,
                None,
            ),
            ("CWE", "Folder Assignment", "O", 0, None, None),
            ("ST", "Document Title", "O", 0, None, None),
            ("DTM", "Agreed Due Date Time", "O", 1, None, None),
        ),
    ),
    "UAC": (
        "User Authentication Credential Segment",
        (
            ("CWE", "User Authentication Credential Type Code", "R", 1, 705, "0615"),
            ("ED", "User Authentication Credential", "R", 1, 65536, None),
        ),
    ),
    "UB1": (
        "UB82",
        (
            ("SI", "Set ID - UB1", "O", 1, 4, None),
            ("WD", "Blood Deductible", "B", 1, None, None),
            ("WD", "Blood Furnished Pints", "B", 1, None, None),
            ("WD", "Blood Replaced Pints", "B", 1, None, None),
            ("WD", "Blood Not Replaced Pints", "B", 1, None, None),
            ("WD", "Co Insurance Days", "B", 1, None, None),
            ("WD", "Condition Code", "B", 1, None, "0043"),
            ("WD", "Covered Days", "B", 1, None, None),
            ("WD", "Non Covered Days", "B", 1, None, None),
            ("WD", "Value Amount Code", "B", 1, None, None),
            ("WD", "Number Of Grace Days", "B", 1, None, None),
            ("WD", "Special Program Indicator", "B", 1, None, "0348"),
            ("WD", "PSRO UR Approval Indicator", "B", 1, None, "0349"),
            ("WD", "PSRO UR Approved Stay Fm", "B", 1, None, None),
            ("WD", "PSRO UR Approved Stay To", "B", 1, None, None),
            ("WD", "Occurrence", "B", 1, None, None),
            ("WD", "Occurrence Span", "B", 1, None, "0351"),
            ("WD", "Occur Span Start Date", "B", 1, None, None),
            ("WD", "Occur Span End Date", "B", 1, None, None),
            ("WD", "Ub 82 Locator 2", "B", 1, None, None),
            ("WD", "Ub 82 Locator 9", "B", 1, None, None),
            ("WD", "Ub 82 Locator 27", "B", 1, None, None),
            ("WD", "Ub 82 Locator 45", "B", 1, None, None),
        ),
    ),
    "UB2": (
        "UB92 Data",
        (
            ("SI", "Set ID - UB2", "O", 1, 4, None),
            ("ST", "Co-Insurance Days (9)", "O", 1, 3, None),
            ("CWE", "Condition Code 24 30", "O", 7, None, "0043"),
            ("ST", "Covered Days (7)", "O", 1, 3, None),
            ("ST", "Non-Covered Days (8)", "O", 1, 4, None),
            ("UVC", "Value Amount & Code", "O", 12, 41, None),
            ("OCD", "Occurrence Code & Date (32-35)", "O", 8, 259, None),
            ("OSP", "Occurrence Span Code/Dates (36)", "O", 2, 268, None),
            ("ST", "UB92 Locator 2 (State)", "O", 2, 29, None),
            ("ST", "UB92 Locator 11 (State)", "O", 2, 12, None),
            ("ST", "UB92 Locator 31 (National)", "O", 1, 5, None),
            ("ST", "Document Control Number", "O", 3, 23, None),
            ("ST", "UB92 Locator 49 (National)", "O", 23, 4, None),
            ("ST", "UB92 Locator 56 (State)", "O", 5, 14, None),
            ("ST", "UB92 Locator 57 (National)", "O", 1, 27, None),
            ("ST", "UB92 Locator 78 (State)", "O", 2, 2, None),
            ("NM", "Special Visit Count", "O", 1, 3, None),
        ),
    ),
    "URD": ("Results/Update Definition", ()),
    "URS": ("Unsolicited Selection", ()),
    "VAR": (
        "Variance",
        (
            ("EI", "Variance Instance ID", "R", 1, None, None),
            ("DTM", "Documented Date Time", "R", 1, None, None),
            ("DTM", "Stated Variance Date Time", "O", 1, None, None),
            ("XCN", "Variance Originator", "O", 0, None, None),
            ("CWE", "Variance Classification", "O", 1, None, None),
            ("ST", "Variance Description", "O", 0, None, None),
        ),
    ),
    "VND": (
        "Purchasing Vendor",
        (
            ("SI", "Set ID VND", "R", 1, None, None),
            ("EI", "Vendor Identifier", "R", 1, None, None),
            ("ST", "Vendor Name", "O", 1, None, None),
            ("EI", "Vendor Catalog Number", "O", 1, None, None),
            ("CNE", "Primary Vendor Indicator", "O", 1, None, "0532"),
        ),
    ),
}
