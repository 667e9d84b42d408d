# src/hl7_definitions/data/v2_5_1/segments.py
"""HL7 v2.5.1 segment definitions."""

SEGMENTS = {
    "ABS": (
        "Abstract",
        (
            ("XCN", "Discharge Care Provider", "O", 1, None, "0010"),
            ("CE", "Transfer Medical Service Code", "O", 1, None, "0069"),
            ("CE", "Severity Of Illness Code", "O", 1, None, "0421"),
            ("TS", "Date Time Of Attestation", "O", 1, None, None),
            ("XCN", "Attested By", "O", 1, None, None),
            ("CE", "Triage Code", "O", 1, None, "0422"),
            ("TS", "Abstract Completion Date Time", "O", 1, None, None),
            ("XCN", "Abstracted By", "O", 1, None, None),
            ("CE", "Case Category Code", "O", 1, None, "0423"),
            ("ID", "Caesarian Section Indicator", "O", 1, None, "0136"),
            ("CE", "Gestation Category Code", "O", 1, None, "0424"),
            ("NM", "Gestation Period Weeks", "O", 1, None, None),
            ("CE", "Newborn Code", "O", 1, None, "0425"),
            ("ID", "Stillborn Indicator", "O", 1, None, "0136"),
        ),
    ),
    "ACC": (
        "Accident",
        (
            ("TS", "Accident Date/Time", "O", 1, 26, None),
            ("CE", "Accident Code", "O", 1, 250, "0050"),
            ("ST", "Accident Location", "O", 1, 25, None),
            ("CE", "Auto Accident State", "O", 1, 250, "0347"),
            ("ID", "Accident Job Related Indicator", "O", 1, 1, "0136"),
            ("ID", "Accident Death Indicator", "O", 1, 12, "0136"),
            ("XCN", "Entered By", "O", 1, 250, None),
            ("ST", "Accident Description", "O", 1, 25, None),
            ("ST", "Brought In By", "O", 1, 80, None),
            ("ID", "Police Notified Indicator", "O", 1, 1, "0136"),
            ("XAD", "Accident Address", "O", 1, 250, None),
        ),
    ),
    "ADD": ("Addendum", (("ST", "Addendum Continuation Pointer", "O", 1, None, None),)),
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
            ("CE", "Resource ID", "O", 1, None, None),
            ("CE", "Resource Type", "R", 1, None, None),
            ("CE", "Resource Group", "O", 0, None, None),
            ("NM", "Resource Quantity", "O", 1, None, None),
            ("CE", "Resource Quantity Units", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CE", "Duration Units", "O", 1, None, None),
            ("IS", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIL": (
        "Appointment Information - Location Resource",
        (
            ("SI", "Set ID AIL", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("PL", "Location Resource ID", "O", 0, None, None),
            ("CE", "Location Type AIL", "O", 1, None, "0305"),
            ("CE", "Location Group", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CE", "Duration Units", "O", 1, None, None),
            ("IS", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIP": (
        "Appointment Information - Personnel Resource",
        (
            ("SI", "Set ID AIP", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("XCN", "Personnel Resource ID", "O", 0, None, None),
            ("CE", "Resource Type", "O", 1, None, "0182"),
            ("CE", "Resource Group", "O", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CE", "Duration Units", "O", 1, None, None),
            ("IS", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CE", "Filler Status Code", "O", 1, None, "0278"),
        ),
    ),
    "AIS": (
        "Appointment Information",
        (
            ("SI", "Set ID AIS", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("CE", "Universal Service Identifier", "R", 1, None, None),
            ("TS", "Start Date Time", "O", 1, None, None),
            ("NM", "Start Date Time Offset", "O", 1, None, None),
            ("CE", "Start Date Time Offset Units", "O", 1, None, None),
            ("NM", "Duration", "O", 1, None, None),
            ("CE", "Duration Units", "O", 1, None, None),
            ("IS", "Allow Substitution Code", "O", 1, None, "0279"),
            ("CE", "Filler Status Code", "O", 1, None, "0278"),
            ("CE", "Placer Supplemental Service Information", "O", 0, None, "0411"),
            ("CE", "Filler Supplemental Service Information", "O", 0, None, "0411"),
        ),
    ),
    "AL1": (
        "Patient Allergy Information",
        (
            ("SI", "Set ID - AL1", "R", 1, 4, None),
            ("CE", "Allergen Type Code", "O", 1, 250, "0127"),
            ("CE", "Allergen Code/Mnemonic/Description", "R", 1, 250, None),
            ("CE", "Allergy Severity Code", "O", 1, 250, "0128"),
            ("ST", "Allergy Reaction Code", "O", 0, 15, None),
            ("DT", "Identification Date", "O", 1, 8, None),
        ),
    ),
    "ANYHL7SEGMENT": (
        "Any HL7 Segment",
        (
            ("varies", "Abs", "O", 0, None, None),
            ("varies", "Acc", "O", 0, None, None),
            ("varies", "Add", "O", 0, None, None),
            ("varies", "Aff", "O", 0, None, None),
            ("varies", "Aig", "O", 0, None, None),
            ("varies", "Ail", "O", 0, None, None),
            ("varies", "Aip", "O", 0, None, None),
            ("varies", "Ais", "O", 0, None, None),
            ("varies", "AL1", "O", 0, None, None),
            ("varies", "Apr", "O", 0, None, None),
            ("varies", "Arq", "O", 0, None, None),
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
            ("varies", "DRG", "O", 0, None, None),
            ("varies", "Dsc", "O", 0, None, None),
            ("varies", "Dsp", "O", 0, None, None),
            ("varies", "Ecd", "O", 0, None, None),
            ("varies", "Ecr", "O", 0, None, None),
            ("varies", "Edu", "O", 0, None, None),
            ("varies", "Eql", "O", 0, None, None),
            ("varies", "Eqp", "O", 0, None, None),
            ("varies", "Equ", "O", 0, None, None),
            ("varies", "Erq", "O", 0, None, None),
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
            ("varies", "Iam", "O", 0, None, None),
            ("varies", "Iim", "O", 0, None, None),
            ("varies", "IN1", "O", 0, None, None),
            ("varies", "IN2", "O", 0, None, None),
            ("varies", "IN3", "O", 0, None, None),
            ("varies", "Inv", "O", 0, None, None),
            ("varies", "Ipc", "O", 0, None, None),
            ("varies", "Isd", "O", 0, None, None),
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
            ("varies", "Pcr", "O", 0, None, None),
            ("varies", "PD1", "O", 0, None, None),
            ("varies", "Pda", "O", 0, None, None),
            ("varies", "Pdc", "O", 0, None, None),
            ("varies", "Peo", "O", 0, None, None),
            ("varies", "Pes", "O", 0, None, None),
            ("varies", "Pid", "O", 0, None, None),
            ("varies", "PR1", "O", 0, None, None),
            ("varies", "Pra", "O", 0, None, None),
            ("varies", "Prb", "O", 0, None, None),
            ("varies", "Prc", "O", 0, None, None),
            ("varies", "Prd", "O", 0, None, None),
            ("varies", "Psh", "O", 0, None, None),
            ("varies", "Pth", "O", 0, None, None),
            ("varies", "PV1", "O", 0, None, None),
            ("varies", "PV2", "O", 0, None, None),
            ("varies", "Qak", "O", 0, None, None),
            ("varies", "Qid", "O", 0, None, None),
            ("varies", "Qpd", "O", 0, None, None),
            ("varies", "Qrd", "O", 0, None, None),
            ("varies", "Qrf", "O", 0, None, None),
            ("varies", "Qri", "O", 0, None, None),
            ("varies", "Rcp", "O", 0, None, None),
            ("varies", "Rdf", "O", 0, None, None),
            ("varies", "Rdt", "O", 0, None, None),
            ("varies", "RF1", "O", 0, None, None),
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
            ("varies", "Sch", "O", 0, None, None),
            ("varies", "Sft", "O", 0, None, None),
            ("varies", "Sid", "O", 0, None, None),
            ("varies", "Spm", "O", 0, None, None),
            ("varies", "Spr", "O", 0, None, None),
            ("varies", "Stf", "O", 0, None, None),
            ("varies", "Tcc", "O", 0, None, None),
            ("varies", "Tcd", "O", 0, None, None),
            ("varies", "TQ1", "O", 0, None, None),
            ("varies", "TQ2", "O", 0, None, None),
            ("varies", "Txa", "O", 0, None, None),
            ("varies", "UB1", "O", 0, None, None),
            ("varies", "UB2", "O", 0, None, None),
            ("varies", "Urd", "O", 0, None, None),
            ("varies", "Urs", "O", 0, None, None),
            ("varies", "Var", "O", 0, None, None),
            ("varies", "Vtq", "O", 0, None, None),
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
            ("CE", "Schedule ID", "O", 1, None, None),
            ("CE", "Request Event Reason", "O", 1, None, None),
            ("CE", "Appointment Reason", "O", 1, None, "0276"),
            ("CE", "Appointment Type", "O", 1, None, "0277"),
            ("NM", "Appointment Duration", "O", 1, None, None),
            ("CE", "Appointment Duration Units", "O", 1, None, None),
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
    "AUT": (
        "Authorization Information",
        (
            ("CE", "Authorizing Payor Plan ID", "O", 1, None, "0072"),
            ("CE", "Authorizing Payor Company ID", "R", 1, None, "0285"),
            ("ST", "Authorizing Payor Company Name", "O", 1, None, None),
            ("TS", "Authorization Effective Date", "O", 1, None, None),
            ("TS", "Authorization Expiration Date", "O", 1, None, None),
            ("EI", "Authorization Identifier", "O", 1, None, None),
            ("CP", "Reimbursement Limit", "O", 1, None, None),
            ("NM", "Requested Number Of Treatments", "O", 1, None, None),
            ("NM", "Authorized Number Of Treatments", "O", 1, None, None),
            ("TS", "Process Date", "O", 1, None, None),
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
            ("TS", "Batch Creation Date Time", "O", 1, None, None),
            ("ST", "Batch Security", "O", 1, None, None),
            ("ST", "Batch Name ID Type", "O", 1, None, None),
            ("ST", "Batch Comment", "O", 1, None, None),
            ("ST", "Batch Control ID", "O", 1, None, None),
            ("ST", "Reference Batch Control ID", "O", 1, None, None),
        ),
    ),
    "BLC": (
        "Blood Code",
        (
            ("CE", "Blood Product Code", "O", 1, None, "0426"),
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
            ("CWE", "Bp Universal Service ID", "R", 1, None, None),
            ("CWE", "Bp Processing Requirements", "O", 0, None, "0508"),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CE", "Bp Units", "O", 1, None, None),
            ("TS", "Bp Intended Use Date Time", "O", 1, None, None),
            ("PL", "Bp Intended Dispense From Location", "O", 1, None, None),
            ("XAD", "Bp Intended Dispense From Address", "O", 1, None, None),
            ("TS", "Bp Requested Dispense Date Time", "O", 1, None, None),
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
            ("TS", "Bp Date Time Of Status", "R", 1, None, None),
            ("EI", "Bc Donation ID", "O", 1, None, None),
            ("CNE", "Bc Component", "O", 1, None, None),
            ("CNE", "Bc Donation Type Intended Use", "O", 1, None, None),
            ("CWE", "Cp Commercial Product", "O", 1, None, "0512"),
            ("XON", "Cp Manufacturer", "O", 1, None, None),
            ("EI", "Cp Lot Number", "O", 1, None, None),
            ("CNE", "Bp Blood Group", "O", 1, None, None),
            ("CNE", "Bc Special Testing", "O", 0, None, None),
            ("TS", "Bp Expiration Date Time", "O", 1, None, None),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CE", "Bp Units", "O", 1, None, None),
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
            ("CNE", "Bc Component", "O", 1, None, None),
            ("CNE", "Bc Blood Group", "O", 1, None, None),
            ("CWE", "Cp Commercial Product", "O", 1, None, "0512"),
            ("XON", "Cp Manufacturer", "O", 1, None, None),
            ("EI", "Cp Lot Number", "O", 1, None, None),
            ("NM", "Bp Quantity", "R", 1, None, None),
            ("NM", "Bp Amount", "O", 1, None, None),
            ("CE", "Bp Units", "O", 1, None, None),
            ("CWE", "Bp Transfusion Disposition Status", "R", 1, None, "0513"),
            ("ID", "Bp Message Status", "R", 1, None, "0511"),
            ("TS", "Bp Date Time Of Status", "R", 1, None, None),
            ("XCN", "Bp Administrator", "O", 1, None, None),
            ("XCN", "Bp Verifier", "O", 1, None, None),
            ("TS", "Bp Transfusion Start Date Time Of Status", "O", 1, None, None),
            ("TS", "Bp Transfusion End Date Time Of Status", "O", 1, None, None),
            ("CWE", "Bp Adverse Reaction Type", "O", 0, None, "0514"),
            ("CWE", "Bp Transfusion Interrupted Reason", "O", 1, None, "0515"),
        ),
    ),
    "CDM": (
        "Charge Description Master",
        (
            ("CE", "Primary Key Value CDM", "R", 1, None, "0132"),
            ("CE", "Charge Code Alias", "O", 0, None, None),
            ("ST", "Charge Description Short", "R", 1, None, None),
            ("ST", "Charge Description Long", "O", 1, None, None),
            ("IS", "Description Override Indicator", "O", 1, None, "0268"),
            ("CE", "Exploding Charges", "O", 0, None, None),
            ("CE", "Procedure Code", "O", 0, None, "0088"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("CE", "Inventory Number", "O", 0, None, "0463"),
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
            ("ED", "Signature Of Issuing Authority", "O", 1, None, None),
            ("ID", "Granting Country", "O", 1, None, "0399"),
            ("CWE", "Granting State Province", "O", 1, None, "0347"),
            ("CWE", "Granting County Parish", "O", 1, None, "0289"),
            ("CWE", "Certificate Type", "O", 1, None, None),
            ("CWE", "Certificate Domain", "O", 1, None, None),
            ("ID", "Subject ID", "O", 1, None, None),
            ("ST", "Subject Name", "R", 1, None, None),
            (
                "CWE",
                "Subject Directory Attribute Extension Health Professional Data",
                "O",
                0,
                None,
                None,
            ),
            ("CWE", "Subject Public Key Info", "O", 1, None, None),
            ("CWE", "Authority Key Identifier", "O", 1, None, None),
            ("ID", "Basic Constraint", "O", 1, None, "0136"),
            ("CWE", "Crl Distribution Point", "O", 0, None, None),
            ("ID", "Jurisdiction Country", "O", 1, None, "0399"),
            ("CWE", "Jurisdiction State Province", "O", 1, None, "0347"),
            ("CWE", "Jurisdiction County Parish", "O", 1, None, "0289"),
            ("CWE", "Jurisdiction Breadth", "O", 0, None, "0547"),
            ("TS", "Granting Date", "O", 1, None, None),
            ("TS", "Issuing Date", "O", 1, None, None),
            ("TS", "Activation Date", "O", 1, None, None),
            ("TS", "Inactivation Date", "O", 1, None, None),
            ("TS", "Expiration Date", "O", 1, None, None),
            ("TS", "Renewal Date", "O", 1, None, None),
            ("TS", "Revocation Date", "O", 1, None, None),
            ("CE", "Revocation Reason Code", "O", 1, None, None),
            ("CWE", "Certificate Status", "O", 1, None, "0536"),
        ),
    ),
    "CM0": (
        "Clinical Study Master",
        (
            ("SI", "Set ID CM0", "O", 1, None, None),
            ("EI", "Sponsor Study ID", "R", 1, None, None),
            ("EI", "Alternate Study ID", "O", 0, None, None),
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
            ("CE", "Study Phase Identifier", "R", 1, None, None),
            ("ST", "Description Of Study Phase", "R", 1, None, None),
        ),
    ),
    "CM2": (
        "Clinical Study Schedule Master",
        (
            ("SI", "Set ID CM2", "O", 1, None, None),
            ("CE", "Scheduled Time Point", "R", 1, None, None),
            ("ST", "Description Of Time Point", "O", 1, None, None),
            ("CE", "Events Scheduled This Time Point", "R", 0, None, None),
        ),
    ),
    "CNS": (
        "Clear Notification",
        (
            ("NM", "Starting Notification Reference Number", "O", 1, None, None),
            ("NM", "Ending Notification Reference Number", "O", 1, None, None),
            ("TS", "Starting Notification Date Time", "O", 1, None, None),
            ("TS", "Ending Notification Date Time", "O", 1, None, None),
            ("CE", "Starting Notification Code", "O", 1, None, None),
            ("CE", "Ending Notification Code", "O", 1, None, None),
        ),
    ),
    "CON": (
        "Consent Segment",
        (
            ("SI", "Set ID CON", "R", 1, None, None),
            ("CWE", "Consent Type", "O", 1, None, "0496"),
            ("ST", "Consent Form ID", "O", 1, None, None),
            ("EI", "Consent Form Number", "O", 1, None, None),
            ("FT", "Consent Text", "O", 0, None, None),
            ("FT", "Subject Specific Consent Text", "O", 0, None, None),
            ("FT", "Consent Background", "O", 0, None, None),
            ("FT", "Subject Specific Consent Background", "O", 0, None, None),
            ("FT", "Consenter Imposed Limitations", "O", 0, None, None),
            ("CNE", "Consent Mode", "O", 1, None, "0497"),
            ("CNE", "Consent Status", "R", 1, None, "0498"),
            ("TS", "Consent Discussion Date Time", "O", 1, None, None),
            ("TS", "Consent Decision Date Time", "O", 1, None, None),
            ("TS", "Consent Effective Date Time", "O", 1, None, None),
            ("TS", "Consent End Date Time", "O", 1, None, None),
            ("ID", "Subject Competence Indicator", "O", 1, None, "0136"),
            ("ID", "Translator Assistance Indicator", "O", 1, None, "0136"),
            ("ID", "Language Translated To", "O", 1, None, "0296"),
            ("ID", "Informational Material Supplied Indicator", "O", 1, None, "0136"),
            ("CWE", "Consent Bypass Reason", "O", 1, None, "0499"),
            ("ID", "Consent Disclosure Level", "O", 1, None, "0500"),
            ("CWE", "Consent Non Disclosure Reason", "O", 1, None, "0501"),
            ("CWE", "Non Subject Consenter Reason", "O", 1, None, "0502"),
            ("XPN", "Consenter ID", "R", 0, None, None),
            ("IS", "Relationship To Subject Table", "R", 0, None, "0548"),
        ),
    ),
    "CSP": (
        "Clinical Study Phase",
        (
            ("CE", "Study Phase Identifier", "R", 1, None, None),
            ("TS", "Date Time Study Phase Began", "R", 1, None, None),
            ("TS", "Date Time Study Phase Ended", "O", 1, None, None),
            ("CE", "Study Phase Evaluability", "O", 1, None, None),
        ),
    ),
    "CSR": (
        "Clinical Study Registration",
        (
            ("EI", "Sponsor Study ID", "R", 1, None, None),
            ("EI", "Alternate Study ID", "O", 1, None, None),
            ("CE", "Institution Registering The Patient", "O", 1, None, None),
            ("CX", "Sponsor Patient ID", "R", 1, None, None),
            ("CX", "Alternate Patient ID CSR", "O", 1, None, None),
            ("TS", "Date Time Of Patient Study Registration", "R", 1, None, None),
            ("XCN", "Person Performing Study Registration", "O", 0, None, None),
            ("XCN", "Study Authorizing Provider", "R", 0, None, None),
            ("TS", "Date Time Patient Study Consent Signed", "O", 1, None, None),
            ("CE", "Patient Study Eligibility Status", "O", 1, None, None),
            ("TS", "Study Randomization Date Time", "O", 0, None, None),
            ("CE", "Randomized Study Arm", "O", 0, None, None),
            ("CE", "Stratum For Study Randomization", "O", 0, None, None),
            ("CE", "Patient Evaluability Status", "O", 1, None, None),
            ("TS", "Date Time Ended Study", "O", 1, None, None),
            ("CE", "Reason Ended Study", "O", 1, None, None),
        ),
    ),
    "CSS": (
        "Clinical Study Data Schedule Segment",
        (
            ("CE", "Study Scheduled Time Point", "R", 1, None, None),
            ("TS", "Study Scheduled Patient Time Point", "O", 1, None, None),
            ("CE", "Study Quality Control Codes", "O", 0, None, None),
        ),
    ),
    "CTD": (
        "Contact Data",
        (
            ("CE", "Contact Role", "R", 0, 250, "0131"),
            ("XPN", "Contact Name", "O", 0, 250, None),
            ("XAD", "Contact Address", "O", 0, 250, None),
            ("PL", "Contact Location", "O", 1, 60, None),
            ("XTN", "Contact Communication Information", "O", 0, 250, None),
            ("CE", "Preferred Method of Contact", "O", 1, 250, "0185"),
            ("PLN", "Contact Identifiers", "O", 0, 100, None),
        ),
    ),
    "CTI": (
        "Clinical Trial Identification",
        (
            ("EI", "Sponsor Study ID", "R", 1, 60, None),
            ("CE", "Study Phase Identifier", "O", 1, 250, None),
            ("CE", "Study Scheduled Time Point", "O", 1, 250, None),
        ),
    ),
    "DB1": (
        "Disability",
        (
            ("SI", "Set ID - DB1", "R", 1, 4, None),
            ("IS", "Disabled Person Code", "O", 1, 2, "0334"),
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
            ("ID", "Diagnosis Coding Method", "O", 1, 2, "0053"),
            ("CE", "Diagnosis Code - DG1", "O", 1, 250, "0051"),
            ("ST", "Diagnosis Description", "O", 1, 40, None),
            ("TS", "Diagnosis Date/Time", "O", 1, 26, None),
            ("IS", "Diagnosis Type", "R", 1, 2, "0052"),
            ("CE", "Major Diagnostic Category", "O", 1, 250, "0118"),
            ("CE", "Diagnostic Related Group", "O", 1, 250, "0055"),
            ("ID", "DRG Approval Indicator", "O", 1, 1, "0136"),
            ("IS", "DRG Grouper Review Code", "O", 1, 2, "0056"),
            ("CE", "Outlier Type", "O", 1, 250, "0083"),
            ("NM", "Outlier Days", "O", 1, 3, None),
            ("CP", "Outlier Cost", "O", 1, 12, None),
            ("ST", "Grouper Version And Type", "O", 1, 4, None),
            ("ID", "Diagnosis Priority", "O", 1, 2, "0359"),
            ("XCN", "Diagnosing Clinician", "O", 0, 250, None),
            ("IS", "Diagnosis Classification", "O", 1, 3, "0228"),
            ("ID", "Confidential Indicator", "O", 1, 1, "0136"),
            ("TS", "Attestation Date/Time", "O", 1, 26, None),
            ("EI", "Diagnosis Identifier", "O", 1, 427, None),
            ("ID", "Diagnosis Action Code", "O", 1, 1, "0206"),
        ),
    ),
    "DRG": (
        "Diagnosis Related Group",
        (
            ("CE", "Diagnostic Related Group", "O", 1, 250, "0055"),
            ("TS", "DRG Assigned Date/Time", "O", 1, 26, None),
            ("ID", "DRG Approval Indicator", "O", 1, 1, "0136"),
            ("IS", "DRG Grouper Review Code", "O", 1, 2, "0056"),
            ("CE", "Outlier Type", "O", 1, 250, "0083"),
            ("NM", "Outlier Days", "O", 1, 3, None),
            ("CP", "Outlier Cost", "O", 1, 12, None),
            ("IS", "DRG Payor", "O", 1, 1, "0229"),
            ("CP", "Outlier Reimbursement", "O", 1, 9, None),
            ("ID", "Confidential Indicator", "O", 1, 1, "0136"),
            ("IS", "DRG Transfer Type", "O", 1, 21, "0415"),
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
            ("CE", "Remote Control Command", "R", 1, None, "0368"),
            ("ID", "Response Required", "O", 1, None, "0136"),
            ("TQ", "Requested Completion Time", "O", 1, None, None),
            ("TX", "Parameters", "O", 0, None, None),
        ),
    ),
    "ECR": (
        "Equipment Command Response",
        (
            ("CE", "Command Response", "R", 1, None, "0387"),
            ("TS", "Date Time Completed", "R", 1, None, None),
            ("TX", "Command Response Parameters", "O", 0, None, None),
        ),
    ),
    "EDU": (
        "Educational Detail",
        (
            ("SI", "Set ID EDU", "R", 1, None, None),
            ("IS", "Academic Degree", "O", 1, None, "0360"),
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
            ("CE", "School Type Code", "O", 1, None, "0402"),
            ("XAD", "School Address", "O", 1, None, None),
            ("CWE", "Major Field Of Study", "O", 0, None, None),
        ),
    ),
    "EQL": (
        "Embedded Query Language",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("ID", "Query Response Format Code", "R", 1, None, "0106"),
            ("CE", "Eql Query Name", "R", 1, None, None),
            ("ST", "Eql Query Statement", "R", 1, None, None),
        ),
    ),
    "EQP": (
        "Equipment/log Service",
        (
            ("CE", "Event Type", "R", 1, None, "0450"),
            ("ST", "File Name", "O", 1, None, None),
            ("TS", "Start Date Time", "R", 1, None, None),
            ("TS", "End Date Time", "O", 1, None, None),
            ("FT", "Transaction Data", "R", 1, None, None),
        ),
    ),
    "EQU": (
        "Equipment Detail",
        (
            ("EI", "Equipment Instance Identifier", "R", 1, None, None),
            ("TS", "Event Date Time", "R", 1, None, None),
            ("CE", "Equipment State", "O", 1, None, "0365"),
            ("CE", "Local Remote Control State", "O", 1, None, "0366"),
            ("CE", "Alert Level", "O", 1, None, "0367"),
        ),
    ),
    "ERQ": (
        "Event Replay Query",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("CE", "Event Identifier", "R", 1, None, None),
            ("QIP", "Input Parameter List", "O", 0, None, None),
        ),
    ),
    "ERR": (
        "Error",
        (
            ("ELD", "Error Code and Location", "O", 0, 493, None),
            ("ERL", "Error Location", "O", 0, 18, None),
            ("CWE", "HL7 Error Code", "R", 1, 705, "0357"),
            ("ID", "Severity", "R", 1, 2, "0516"),
            ("CWE", "Application Error Code", "O", 1, 705, "0533"),
            ("ST", "Application Error Parameter", "O", 0, 80, None),
            ("TX", "Diagnostic Information", "O", 1, 2048, None),
            ("TX", "User Message", "O", 1, 250, None),
            ("IS", "Inform Person Indicator", "O", 0, 20, "0517"),
            ("CWE", "Override Type", "O", 1, 705, "0518"),
            ("CWE", "Override Reason Code", "O", 0, 705, "0519"),
            ("XTN", "Help Desk Contact Point", "O", 0, 652, None),
        ),
    ),
    "EVN": (
        "Event Type",
        (
            ("ID", "Event Type Code", "O", 1, 3, "0003"),
            ("TS", "Recorded Date/Time", "R", 1, 26, None),
            ("TS", "Date/Time Planned Event", "O", 1, 26, None),
            ("IS", "Event Reason Code", "O", 1, 3, "0062"),
            ("XCN", "Operator ID", "O", 0, 250, "0188"),
            ("TS", "Event Occurred", "O", 1, 26, None),
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
            ("SI", "Set ID - FT1", "O", 1, 4, None),
            ("ST", "Transaction ID", "O", 1, 12, None),
            ("ST", "Transaction Batch ID", "O", 1, 10, None),
            ("DR", "Transaction Date", "R", 1, 53, None),
            ("TS", "Transaction Posting Date", "O", 1, 26, None),
            ("IS", "Transaction Type", "R", 1, 8, "0017"),
            ("CE", "Transaction Code", "R", 1, 250, "0132"),
            ("ST", "Transaction Description", "O", 1, 40, None),
            ("ST", "Transaction Description - Alt", "O", 1, 40, None),
            ("NM", "Transaction Quantity", "O", 1, 6, None),
            ("CP", "Transaction Amount - Extended", "O", 1, 12, None),
            ("CP", "Transaction amount - unit", "O", 1, 12, None),
            ("CE", "Department Code", "O", 1, 250, "0049"),
            ("CE", "Insurance Plan ID", "O", 1, 250, "0072"),
            ("CP", "Insurance Amount", "O", 1, 12, None),
            ("PL", "Assigned Patient Location", "O", 1, 80, None),
            ("IS", "Fee Schedule", "O", 1, 1, "0024"),
            ("IS", "Patient Type", "O", 1, 2, "0018"),
            ("CE", "Diagnosis Code - FT1", "O", 0, 250, "0051"),
            ("XCN", "Performed By Code", "O", 0, 250, "0084"),
            ("XCN", "Ordered By Code", "O", 0, 250, None),
            ("CP", "Unit Cost", "O", 1, 12, None),
            ("EI", "Filler Order Number", "O", 1, 427, None),
            ("XCN", "Entered By Code", "O", 0, 250, None),
            ("CE", "Procedure Code", "O", 1, 250, "0088"),
            ("CE", "Procedure Code Modifier", "O", 0, 250, "0340"),
            ("CE", "Advanced Beneficiary Notice Code", "O", 1, 250, "0339"),
            (
                "CWE",
                "Medically Necessary Duplicate Procedure Reason",
                "O",
                1,
                250,
                "0476",
            ),
            ("CNE", "NDC Code", "O", 1, 250, "0549"),
            ("CX", "Payment Reference ID", "O", 1, 250, None),
            ("SI", "Transaction Reference Key", "O", 0, 4, None),
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
            ("TS", "Action Date Time", "R", 1, None, None),
            ("CE", "Goal ID", "R", 1, None, None),
            ("EI", "Goal Instance ID", "R", 1, None, None),
            ("EI", "Episode Of Care ID", "O", 1, None, None),
            ("NM", "Goal List Priority", "O", 1, None, None),
            ("TS", "Goal Established Date Time", "O", 1, None, None),
            ("TS", "Expected Goal Achieve Date Time", "O", 1, None, None),
            ("CE", "Goal Classification", "O", 1, None, None),
            ("CE", "Goal Management Discipline", "O", 1, None, None),
            ("CE", "Current Goal Review Status", "O", 1, None, None),
            ("TS", "Current Goal Review Date Time", "O", 1, None, None),
            ("TS", "Next Goal Review Date Time", "O", 1, None, None),
            ("TS", "Previous Goal Review Date Time", "O", 1, None, None),
            ("TQ", "Goal Review Interval", "O", 1, None, None),
            ("CE", "Goal Evaluation", "O", 1, None, None),
            ("ST", "Goal Evaluation Comment", "O", 0, None, None),
            ("CE", "Goal Life Cycle Status", "O", 1, None, None),
            ("TS", "Goal Life Cycle Status Date Time", "O", 1, None, None),
            ("CE", "Goal Target Type", "O", 0, None, None),
            ("XPN", "Goal Target Name", "O", 0, None, None),
        ),
    ),
    "GP1": (
        "Grouping/Reimbursement - Visit",
        (
            ("IS", "Type Of Bill Code", "R", 1, None, "0455"),
            ("IS", "Revenue Code", "O", 0, None, "0456"),
            ("IS", "Overall Claim Disposition Code", "O", 1, None, "0457"),
            ("IS", "Oce Edits Per Visit Code", "O", 0, None, "0458"),
            ("CP", "Outlier Cost", "O", 1, None, None),
        ),
    ),
    "GP2": (
        "Grouping/Reimbursement - Procedure Line Item",
        (
            ("IS", "Revenue Code", "O", 1, None, "0456"),
            ("NM", "Number Of Service Units", "O", 1, None, None),
            ("CP", "Charge", "O", 1, None, None),
            ("IS", "Reimbursement Action Code", "O", 1, None, "0459"),
            ("IS", "Denial Or Rejection Code", "O", 1, None, "0460"),
            ("IS", "Oce Edit Code", "O", 0, None, "0458"),
            ("CE", "Ambulatory Payment Classification Code", "O", 1, None, "0466"),
            ("IS", "Modifier Edit Code", "O", 0, None, "0467"),
            ("IS", "Payment Adjustment Code", "O", 1, None, "0468"),
            ("IS", "Packaging Status Code", "O", 1, None, "0469"),
            ("CP", "Expected Cms Payment Amount", "O", 1, None, None),
            ("IS", "Reimbursement Type Code", "O", 1, None, "0470"),
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
            ("TS", "Guarantor Date/Time Of Birth", "O", 1, 26, None),
            ("IS", "Guarantor Administrative Sex", "O", 1, 1, "0001"),
            ("IS", "Guarantor Type", "O", 1, 2, "0068"),
            ("CE", "Guarantor Relationship", "O", 1, 250, "0063"),
            ("ST", "Guarantor SSN", "O", 1, 11, None),
            ("DT", "Guarantor Date - Begin", "O", 1, 8, None),
            ("DT", "Guarantor Date - End", "O", 1, 8, None),
            ("NM", "Guarantor Priority", "O", 1, 2, None),
            ("XPN", "Guarantor Employer Name", "O", 0, 250, None),
            ("XAD", "Guarantor Employer Address", "O", 0, 250, None),
            ("XTN", "Guarantor Employer Phone Number", "O", 0, 250, None),
            ("CX", "Guarantor Employee ID Number", "O", 0, 250, None),
            ("IS", "Guarantor Employment Status", "O", 1, 2, "0066"),
            ("XON", "Guarantor Organization Name", "O", 0, 250, None),
            ("ID", "Guarantor Billing Hold Flag", "O", 1, 1, "0136"),
            ("CE", "Guarantor Credit Rating Code", "O", 1, 250, "0341"),
            ("TS", "Guarantor Death Date And Time", "O", 1, 26, None),
            ("ID", "Guarantor Death Flag", "O", 1, 1, "0136"),
            ("CE", "Guarantor Charge Adjustment Code", "O", 1, 250, "0218"),
            ("CP", "Guarantor Household Annual Income", "O", 1, 10, None),
            ("NM", "Guarantor Household Size", "O", 1, 3, None),
            ("CX", "Guarantor Employer ID Number", "O", 0, 250, None),
            ("CE", "Guarantor Marital Status Code", "O", 1, 250, "0002"),
            ("DT", "Guarantor Hire Effective Date", "O", 1, 8, None),
            ("DT", "Employment Stop Date", "O", 1, 8, None),
            ("IS", "Living Dependency", "O", 1, 2, "0223"),
            ("IS", "Ambulatory Status", "O", 0, 2, "0009"),
            ("CE", "Citizenship", "O", 0, 250, "0171"),
            ("CE", "Primary Language", "O", 1, 250, "0296"),
            ("IS", "Living Arrangement", "O", 1, 2, "0220"),
            ("CE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("IS", "Student Indicator", "O", 1, 2, "0231"),
            ("CE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CE", "Nationality", "O", 1, 250, "0212"),
            ("CE", "Ethnic Group", "O", 0, 250, "0189"),
            ("XPN", "Contact Person's Name", "O", 0, 250, None),
            ("XTN", "Contact Person's Telephone Number", "O", 0, 250, None),
            ("CE", "Contact Reason", "O", 1, 250, "0222"),
            ("IS", "Contact Relationship", "O", 1, 3, "0063"),
            ("ST", "Job Title", "O", 1, 20, None),
            ("JCC", "Job Code/Class", "O", 1, 20, None),
            ("XON", "Guarantor Employer's Organization Name", "O", 0, 250, None),
            ("IS", "Handicap", "O", 1, 2, "0295"),
            ("IS", "Job Status", "O", 1, 2, "0311"),
            ("FC", "Guarantor Financial Class", "O", 1, 50, None),
            ("CE", "Guarantor Race", "O", 0, 250, "0005"),
            ("ST", "Guarantor Birth Place", "O", 1, 250, None),
            ("IS", "VIP Indicator", "O", 1, 2, "0099"),
        ),
    ),
    "IAM": (
        "Patient Adverse Reaction Information",
        (
            ("SI", "Set ID IAM", "R", 1, None, None),
            ("CE", "Allergen Type Code", "O", 1, None, "0127"),
            ("CE", "Allergen Code Mnemonic Description", "R", 1, None, None),
            ("CE", "Allergy Severity Code", "O", 1, None, "0128"),
            ("ST", "Allergy Reaction Code", "O", 0, None, None),
            ("CNE", "Allergy Action Code", "R", 1, None, "0323"),
            ("EI", "Allergy Unique Identifier", "O", 1, None, None),
            ("ST", "Action Reason", "O", 1, None, None),
            ("CE", "Sensitivity To Causative Agent Code", "O", 1, None, "0436"),
            ("CE", "Allergen Group Code Mnemonic Description", "O", 1, None, None),
            ("DT", "Onset Date", "O", 1, None, None),
            ("ST", "Onset Date Text", "O", 1, None, None),
            ("TS", "Reported Date Time", "O", 1, None, None),
            ("XPN", "Reported By", "O", 1, None, None),
            ("CE", "Relationship To Patient Code", "O", 1, None, "0063"),
            ("CE", "Alert Device Code", "O", 1, None, "0437"),
            ("CE", "Allergy Clinical Status Code", "O", 1, None, "0438"),
            ("XCN", "Statused By Person", "O", 1, None, None),
            ("XON", "Statused By Organization", "O", 1, None, None),
            ("TS", "Statused At Date Time", "O", 1, None, None),
        ),
    ),
    "IIM": (
        "Inventory Item Master",
        (
            ("CWE", "Primary Key Value IIM", "R", 1, None, None),
            ("CWE", "Service Item Code", "R", 1, None, None),
            ("ST", "Inventory Lot Number", "O", 1, None, None),
            ("TS", "Inventory Expiration Date", "O", 1, None, None),
            ("CWE", "Inventory Manufacturer Name", "O", 1, None, None),
            ("CWE", "Inventory Location", "O", 1, None, None),
            ("TS", "Inventory Received Date", "O", 1, None, None),
            ("NM", "Inventory Received Quantity", "O", 1, None, None),
            ("CWE", "Inventory Received Quantity Unit", "O", 1, None, None),
            ("MO", "Inventory Received Item Cost", "O", 1, None, None),
            ("TS", "Inventory On Hand Date", "O", 1, None, None),
            ("NM", "Inventory On Hand Quantity", "O", 1, None, None),
            ("CWE", "Inventory On Hand Quantity Unit", "O", 1, None, None),
            ("CE", "Procedure Code", "O", 1, None, "0088"),
            ("CE", "Procedure Code Modifier", "O", 0, None, "0340"),
        ),
    ),
    "IN1": (
        "Insurance",
        (
            ("SI", "Set ID - IN1", "R", 1, 4, None),
            ("CE", "Insurance Plan ID", "R", 1, 250, "0072"),
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
            ("IS", "Plan Type", "O", 1, 3, "0086"),
            ("XPN", "Name Of Insured", "O", 0, 250, None),
            ("CE", "Insured's Relationship To Patient", "O", 1, 250, "0063"),
            ("TS", "Insured's Date Of Birth", "O", 1, 26, None),
            ("XAD", "Insured's Address", "O", 0, 250, None),
            ("IS", "Assignment Of Benefits", "O", 1, 2, "0135"),
            ("IS", "Coordination Of Benefits", "O", 1, 2, "0173"),
            ("ST", "Coord Of Ben. Priority", "O", 1, 2, None),
            ("ID", "Notice Of Admission Flag", "O", 1, 1, "0136"),
            ("DT", "Notice Of Admission Date", "O", 1, 8, None),
            ("ID", "Report Of Eligibility Flag", "O", 1, 1, "0136"),
            ("DT", "Report Of Eligibility Date", "O", 1, 8, None),
            ("IS", "Release Information Code", "O", 1, 2, "0093"),
            ("ST", "Pre-Admit Cert (PAC)", "O", 1, 15, None),
            ("TS", "Verification Date/Time", "O", 1, 26, None),
            ("XCN", "Verification By", "O", 0, 250, None),
            ("IS", "Type Of Agreement Code", "O", 1, 2, "0098"),
            ("IS", "Billing Status", "O", 1, 2, "0022"),
            ("NM", "Lifetime Reserve Days", "O", 1, 4, None),
            ("NM", "Delay Before L.R. Day", "O", 1, 4, None),
            ("IS", "Company Plan Code", "O", 1, 8, "0042"),
            ("ST", "Policy Number", "O", 1, 15, None),
            ("CP", "Policy Deductible", "O", 1, 12, None),
            ("CP", "Policy Limit - Amount", "O", 1, 12, None),
            ("NM", "Policy Limit - Days", "O", 1, 4, None),
            ("CP", "Room Rate - Semi-Private", "O", 1, 12, None),
            ("CP", "Room Rate - Private", "O", 1, 12, None),
            ("CE", "Insured's Employment Status", "O", 1, 250, "0066"),
            ("IS", "Insured's Administrative Sex", "O", 1, 1, "0001"),
            ("XAD", "Insured's Employer's Address", "O", 0, 250, None),
            ("ST", "Verification Status", "O", 1, 2, None),
            ("IS", "Prior Insurance Plan ID", "O", 1, 8, "0072"),
            ("IS", "Coverage Type", "O", 1, 3, "0309"),
            ("IS", "Handicap", "O", 1, 2, "0295"),
            ("CX", "Insured's ID Number", "O", 0, 250, None),
            ("IS", "Signature Code", "O", 1, 1, "0535"),
            ("DT", "Signature Code Date", "O", 1, 8, None),
            ("ST", "Insured's Birth Place", "O", 1, 250, None),
            ("IS", "VIP Indicator", "O", 1, 2, "0099"),
        ),
    ),
    "IN2": (
        "Insurance Additional Information",
        (
            ("CX", "Insured's Employee ID", "O", 0, 250, None),
            ("ST", "Insured's Social Security Number", "O", 1, 11, None),
            ("XCN", "Insured's Employer's Name and ID", "O", 0, 250, None),
            ("IS", "Employer Information Data", "O", 1, 1, "0139"),
            ("IS", "Mail Claim Party", "O", 0, 1, "0137"),
            ("ST", "Medicare Health Ins Card Number", "O", 1, 15, None),
            ("XPN", "Medicaid Case Name", "O", 0, 250, None),
            ("ST", "Medicaid Case Number", "O", 1, 15, None),
            ("XPN", "Military Sponsor Name", "O", 0, 250, None),
            ("ST", "Military ID Number", "O", 1, 20, None),
            ("CE", "Dependent Of Military Recipient", "O", 1, 250, "0342"),
            ("ST", "Military Organization", "O", 1, 25, None),
            ("ST", "Military Station", "O", 1, 25, None),
            ("IS", "Military Service", "O", 1, 14, "0140"),
            ("IS", "Military Rank/Grade", "O", 1, 2, "0141"),
            ("IS", "Military Status", "O", 1, 3, "0142"),
            ("DT", "Military Retire Date", "O", 1, 8, None),
            ("ID", "Military Non-Avail Cert On File", "O", 1, 1, "0136"),
            ("ID", "Baby Coverage", "O", 1, 1, "0136"),
            ("ID", "Combine Baby Bill", "O", 1, 1, "0136"),
            ("ST", "Blood Deductible", "O", 1, 1, None),
            ("XPN", "Special Coverage Approval Name", "O", 0, 250, None),
            ("ST", "Special Coverage Approval Title", "O", 1, 30, None),
            ("IS", "Non-Covered Insurance Code", "O", 0, 8, "0143"),
            ("CX", "Payor ID", "O", 0, 250, None),
            ("CX", "Payor Subscriber ID", "O", 0, 250, None),
            ("IS", "Eligibility Source", "O", 1, 1, "0144"),
            ("RMC", "Room Coverage Type/Amount", "O", 0, 82, None),
            ("PTA", "Policy Type/Amount", "O", 0, 56, None),
            ("DDI", "Daily Deductible", "O", 1, 25, None),
            ("IS", "Living Dependency", "O", 1, 2, "0223"),
            ("IS", "Ambulatory Status", "O", 0, 2, "0009"),
            ("CE", "Citizenship", "O", 0, 250, "0171"),
            ("CE", "Primary Language", "O", 1, 250, "0296"),
            ("IS", "Living Arrangement", "O", 1, 2, "0220"),
            ("CE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("IS", "Student Indicator", "O", 1, 2, "0231"),
            ("CE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CE", "Nationality", "O", 1, 250, "0212"),
            ("CE", "Ethnic Group", "O", 0, 250, "0189"),
            ("CE", "Marital Status", "O", 0, 250, "0002"),
            ("DT", "Insured's Employment Start Date", "O", 1, 8, None),
            ("DT", "Employment Stop Date", "O", 1, 8, None),
            ("ST", "Job Title", "O", 1, 20, None),
            ("JCC", "Job Code/Class", "O", 1, 20, None),
            ("IS", "Job Status", "O", 1, 2, "0311"),
            ("XPN", "Employer Contact Person Name", "O", 0, 250, None),
            ("XTN", "Employer Contact Person Phone Number", "O", 0, 250, None),
            ("IS", "Employer Contact Reason", "O", 1, 2, "0222"),
            ("XPN", "Insured's Contact Person's Name", "O", 0, 250, None),
            ("XTN", "Insured's Contact Person Phone Number", "O", 0, 250, None),
            ("IS", "Insured's Contact Person Reason", "O", 0, 2, "0222"),
            ("DT", "Relationship to the Patient Start Date", "O", 1, 8, None),
            ("DT", "Relationship to the Patient Stop Date", "O", 0, 8, None),
            ("IS", "Insurance Co. Contact Reason", "O", 1, 2, "0232"),
            ("XTN", "Insurance Co Contact Phone Number", "O", 1, 250, None),
            ("IS", "Policy Scope", "O", 1, 2, "0312"),
            ("IS", "Policy Source", "O", 1, 2, "0313"),
            ("CX", "Patient Member Number", "O", 1, 250, None),
            ("CE", "Guarantor's Relationship to Insured", "O", 1, 250, "0063"),
            ("XTN", "Insured's Phone Number - Home", "O", 0, 250, None),
            ("XTN", "Insured's Employer Phone Number", "O", 0, 250, None),
            ("CE", "Military Handicapped Program", "O", 1, 250, "0343"),
            ("ID", "Suspend Flag", "O", 1, 1, "0136"),
            ("ID", "Copay Limit Flag", "O", 1, 1, "0136"),
            ("ID", "Stoploss Limit Flag", "O", 1, 1, "0136"),
            ("XON", "Insured Organization Name and ID", "O", 0, 250, None),
            ("XON", "Insured Employer Organization Name and ID", "O", 0, 250, None),
            ("CE", "Race", "O", 0, 250, "0005"),
            ("CE", "CMS Patient's Relationship to Insured", "O", 1, 250, "0344"),
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
            ("TS", "Certification Date/Time", "O", 1, 26, None),
            ("TS", "Certification Modify Date/Time", "O", 1, 26, None),
            ("XCN", "Operator", "O", 0, 250, None),
            ("DT", "Certification Begin Date", "O", 1, 8, None),
            ("DT", "Certification End Date", "O", 1, 8, None),
            ("DTN", "Days", "O", 1, 6, None),
            ("CE", "Non-Concur Code/Description", "O", 1, 250, "0233"),
            ("TS", "Non-Concur Effective Date/Time", "O", 1, 26, None),
            ("XCN", "Physician Reviewer", "O", 0, 250, "0010"),
            ("ST", "Certification Contact", "O", 1, 48, None),
            ("XTN", "Certification Contact Phone Number", "O", 0, 250, None),
            ("CE", "Appeal Reason", "O", 1, 250, "0345"),
            ("CE", "Certification Agency", "O", 1, 250, "0346"),
            ("XTN", "Certification Agency Phone Number", "O", 0, 250, None),
            ("ICD", "Pre-Certification Requirement", "O", 0, 40, None),
            ("ST", "Case Manager", "O", 1, 48, None),
            ("DT", "Second Opinion Date", "O", 1, 8, None),
            ("IS", "Second Opinion Status", "O", 1, 1, "0151"),
            ("IS", "Second Opinion Documentation Received", "O", 0, 1, "0152"),
            ("XCN", "Second Opinion Physician", "O", 0, 250, "0010"),
        ),
    ),
    "INV": (
        "Inventory Detail",
        (
            ("CE", "Substance Identifier", "R", 1, None, "0451"),
            ("CE", "Substance Status", "R", 0, None, "0383"),
            ("CE", "Substance Type", "O", 1, None, "0384"),
            ("CE", "Inventory Container Identifier", "O", 1, None, None),
            ("CE", "Container Carrier Identifier", "O", 1, None, None),
            ("CE", "Position On Carrier", "O", 1, None, None),
            ("NM", "Initial Quantity", "O", 1, None, None),
            ("NM", "Current Quantity", "O", 1, None, None),
            ("NM", "Available Quantity", "O", 1, None, None),
            ("NM", "Consumption Quantity", "O", 1, None, None),
            ("CE", "Quantity Units", "O", 1, None, None),
            ("TS", "Expiration Date Time", "O", 1, None, None),
            ("TS", "First Used Date Time", "O", 1, None, None),
            ("TQ", "On Board Stability Duration", "O", 1, None, None),
            ("CE", "Test Fluid Identifier S", "O", 0, None, None),
            ("ST", "Manufacturer Lot Number", "O", 1, None, None),
            ("CE", "Manufacturer Identifier", "O", 1, None, "0385"),
            ("CE", "Supplier Identifier", "O", 1, None, "0386"),
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
            ("CE", "Modality", "O", 1, None, None),
            ("CE", "Protocol Code", "O", 0, None, None),
            ("EI", "Scheduled Station Name", "O", 1, None, None),
            ("CE", "Scheduled Procedure Step Location", "O", 0, None, None),
            ("ST", "Scheduled Ae Title", "O", 1, None, None),
        ),
    ),
    "ISD": (
        "Interaction Status Detail",
        (
            (
                "NM",
                "Reference Interaction Number Unique Identifier",
                "R",
                1,
                None,
                None,
            ),
            ("CE", "Interaction Type Identifier", "O", 1, None, "0368"),
            ("CE", "Interaction Active State", "R", 1, None, "0387"),
        ),
    ),
    "LAN": (
        "Language Detail",
        (
            ("SI", "Set ID LAN", "R", 1, None, None),
            ("CE", "Language Code", "R", 1, None, "0296"),
            ("CE", "Language Ability Code", "O", 0, None, "0403"),
            ("CE", "Language Proficiency Code", "O", 1, None, "0404"),
        ),
    ),
    "LCC": (
        "Location Charge Code",
        (
            ("PL", "Primary Key Value LCC", "R", 1, None, None),
            ("CE", "Location Department", "R", 1, None, "0264"),
            ("CE", "Accommodation Type", "O", 0, None, "0129"),
            ("CE", "Charge Code", "R", 0, None, "0132"),
        ),
    ),
    "LCH": (
        "Location Characteristic",
        (
            ("PL", "Primary Key Value LCH", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("EI", "Segment Unique Key", "O", 1, None, None),
            ("CE", "Location Characteristic ID", "R", 1, None, "0324"),
            ("CE", "Location Characteristic Value LCH", "R", 1, None, "0136"),
        ),
    ),
    "LDP": (
        "Location Department",
        (
            ("PL", "Primary Key Value LDP", "R", 1, None, None),
            ("CE", "Location Department", "R", 1, None, "0264"),
            ("IS", "Location Service", "O", 0, None, "0069"),
            ("CE", "Specialty Type", "O", 0, None, "0265"),
            ("IS", "Valid Patient Classes", "O", 0, None, "0004"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("TS", "Activation Date LDP", "O", 1, None, None),
            ("TS", "Inactivation Date LDP", "O", 1, None, None),
            ("ST", "Inactivated Reason", "O", 1, None, None),
            ("VH", "Visiting Hours", "O", 0, None, "0267"),
            ("XTN", "Contact Phone", "O", 1, None, None),
            ("CE", "Location Cost Center", "O", 1, None, "0462"),
        ),
    ),
    "LOC": (
        "Location Identification",
        (
            ("PL", "Primary Key Value LOC", "R", 1, None, None),
            ("ST", "Location Description", "O", 1, None, None),
            ("IS", "Location Type LOC", "R", 0, None, "0260"),
            ("XON", "Organization Name LOC", "O", 0, None, None),
            ("XAD", "Location Address", "O", 0, None, None),
            ("XTN", "Location Phone", "O", 0, None, None),
            ("CE", "License Number", "O", 0, None, "0461"),
            ("IS", "Location Equipment", "O", 0, None, "0261"),
            ("IS", "Location Service Code", "O", 1, None, "0442"),
        ),
    ),
    "LRL": (
        "Location Relationship",
        (
            ("PL", "Primary Key Value LRL", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("EI", "Segment Unique Key", "O", 1, None, None),
            ("CE", "Location Relationship ID", "R", 1, None, "0325"),
            ("XON", "Organizational Location Relationship Value", "O", 0, None, None),
            ("PL", "Patient Location Relationship Value", "O", 1, None, None),
        ),
    ),
    "MFA": (
        "Master File Acknowledgment",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("TS", "Event Completion Date Time", "O", 1, None, None),
            ("CE", "Mfn Record Level Error Return", "R", 1, None, "0181"),
            ("varies", "Primary Key Value MFA", "R", 0, None, "9999"),
            ("ID", "Primary Key Value Type MFA", "R", 0, None, "0355"),
        ),
    ),
    "MFE": (
        "Master File Entry",
        (
            ("ID", "Record Level Event Code", "R", 1, None, "0180"),
            ("ST", "Mfn Control ID", "O", 1, None, None),
            ("TS", "Effective Date Time", "O", 1, None, None),
            ("varies", "Primary Key Value MFE", "R", 0, None, "9999"),
            ("ID", "Primary Key Value Type", "R", 0, None, "0355"),
        ),
    ),
    "MFI": (
        "Master File Identification",
        (
            ("CE", "Master File Identifier", "R", 1, None, "0175"),
            ("HD", "Master File Application Identifier", "O", 1, None, "0361"),
            ("ID", "File Level Event Code", "R", 1, None, "0178"),
            ("TS", "Entered Date Time", "O", 1, None, None),
            ("TS", "Effective Date Time", "O", 1, None, None),
            ("ID", "Response Level Code", "R", 1, None, "0179"),
        ),
    ),
    "MRG": (
        "Merge Patient Information",
        (
            ("CX", "Prior Patient Identifier List", "R", 0, None, None),
            ("CX", "Prior Alternate Patient ID", "O", 0, None, None),
            ("CX", "Prior Patient Account Number", "O", 1, None, None),
            ("CX", "Prior Patient ID", "O", 1, None, None),
            ("CX", "Prior Visit Number", "O", 1, None, None),
            ("CX", "Prior Alternate Visit ID", "O", 1, None, None),
            ("XPN", "Prior Patient Name", "O", 0, None, None),
        ),
    ),
    "MSA": (
        "Message Acknowledgment",
        (
            ("ID", "Acknowledgment Code", "R", 1, 2, "0008"),
            ("ST", "Message Control ID", "R", 1, 20, None),
            ("ST", "Text Message", "O", 1, 80, None),
            ("NM", "Expected Sequence Number", "O", 1, 15, None),
            ("ID", "Delayed Acknowledgment Type", "B", 1, 1, None),
            ("CE", "Error Condition", "O", 1, 250, "0357"),
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
            ("TS", "Date/Time Of Message", "R", 1, 26, None),
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
            ("CE", "Principal Language Of Message", "O", 1, 250, None),
            ("ID", "Alternate Character Set Handling Scheme", "O", 1, 20, "0356"),
            ("EI", "Message Profile Identifier", "O", 0, 427, None),
        ),
    ),
    "NCK": ("System Clock", (("TS", "System Date Time", "R", 1, None, None),)),
    "NDS": (
        "Notification Detail",
        (
            ("NM", "Notification Reference Number", "R", 1, None, None),
            ("TS", "Notification Date Time", "R", 1, None, None),
            ("CE", "Notification Alert Severity", "R", 1, None, "0367"),
            ("CE", "Notification Code", "R", 1, None, None),
        ),
    ),
    "NK1": (
        "Next of Kin / Associated Parties",
        (
            ("SI", "Set ID - NK1", "R", 1, 4, None),
            ("XPN", "Name", "O", 0, 250, None),
            ("CE", "Relationship", "O", 1, 250, "0063"),
            ("XAD", "Address", "O", 0, 250, None),
            ("XTN", "Phone Number", "O", 0, 250, None),
            ("XTN", "Business Phone Number", "O", 0, 250, None),
            ("CE", "Contact Role", "O", 1, 250, "0131"),
            ("DT", "Start Date", "O", 1, 8, None),
            ("DT", "End Date", "O", 1, 8, None),
            ("ST", "Next of Kin / Associated Parties Job Title", "O", 1, 60, None),
            (
                "JCC",
                "Next of Kin / Associated Parties Job Code/Class",
                "O",
                1,
                20,
                "0327",
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
            ("CE", "Marital Status", "O", 1, 250, "0002"),
            ("IS", "Administrative Sex", "O", 1, 1, "0001"),
            ("TS", "Date/Time of Birth", "O", 1, 26, None),
            ("IS", "Living Dependency", "O", 0, 2, "0223"),
            ("IS", "Ambulatory Status", "O", 0, 2, "0009"),
            ("CE", "Citizenship", "O", 0, 250, "0171"),
            ("CE", "Primary Language", "O", 1, 250, "0296"),
            ("IS", "Living Arrangement", "O", 1, 2, "0220"),
            ("CE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("IS", "Student Indicator", "O", 1, 2, "0231"),
            ("CE", "Religion", "O", 1, 250, "0006"),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("CE", "Nationality", "O", 1, 250, "0212"),
            ("CE", "Ethnic Group", "O", 0, 250, "0189"),
            ("CE", "Contact Reason", "O", 0, 250, "0222"),
            ("XPN", "Contact Person's Name", "O", 0, 250, None),
            ("XTN", "Contact Person's Telephone Number", "O", 0, 250, None),
            ("XAD", "Contact Person's Address", "O", 0, 250, None),
            ("CX", "Next of Kin/Associated Party's Identifiers", "O", 0, 250, None),
            ("IS", "Job Status", "O", 1, 2, "0311"),
            ("CE", "Race", "O", 0, 250, "0005"),
            ("IS", "Handicap", "O", 1, 2, "0295"),
            ("ST", "Contact Person Social Security Number", "O", 1, 16, None),
            ("ST", "Next of Kin Birth Place", "O", 1, 250, None),
            ("IS", "VIP Indicator", "O", 1, 2, "0099"),
        ),
    ),
    "NPU": (
        "Bed Status Update",
        (
            ("PL", "Bed Location", "R", 1, None, None),
            ("IS", "Bed Status", "O", 1, None, "0116"),
        ),
    ),
    "NSC": (
        "Application Status Change",
        (
            ("IS", "Application Change Type", "R", 1, None, "0409"),
            ("ST", "Current Cpu", "O", 1, None, None),
            ("ST", "Current Fileserver", "O", 1, None, None),
            ("HD", "Current Application", "O", 1, None, None),
            ("HD", "Current Facility", "O", 1, None, None),
            ("ST", "New Cpu", "O", 1, None, None),
            ("ST", "New Fileserver", "O", 1, None, None),
            ("HD", "New Application", "O", 1, None, None),
            ("HD", "New Facility", "O", 1, None, None),
        ),
    ),
    "NST": (
        "Application Control Level Statistics",
        (
            ("ID", "Statistics Available", "R", 1, None, "0136"),
            ("ST", "Source Identifier", "O", 1, None, None),
            ("ID", "Source Type", "O", 1, None, "0332"),
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
            ("NM", "Application Control Level Errors", "O", 1, None, None),
        ),
    ),
    "NTE": (
        "Notes and Comments",
        (
            ("SI", "Set ID - NTE", "O", 1, 4, None),
            ("ID", "Source of Comment", "O", 1, 8, "0105"),
            ("FT", "Comment", "O", 0, 65536, None),
            ("CE", "Comment Type", "O", 1, 250, "0364"),
        ),
    ),
    "OBR": (
        "Observation Request",
        (
            ("SI", "Set ID - OBR", "O", 1, 4, None),
            ("EI", "Placer Order Number", "O", 1, 22, None),
            ("EI", "Filler Order Number", "O", 1, 22, None),
            ("CE", "Universal Service Identifier", "R", 1, 250, None),
            ("ID", "Priority - OBR", "O", 1, 2, None),
            ("TS", "Requested Date/Time", "O", 1, 26, None),
            ("TS", "Observation Date/Time", "O", 1, 26, None),
            ("TS", "Observation End Date/Time", "O", 1, 26, None),
            ("CQ", "Collection Volume", "O", 1, 20, None),
            ("XCN", "Collector Identifier", "O", 0, 250, None),
            ("ID", "Specimen Action Code", "O", 1, 1, "0065"),
            ("CE", "Danger Code", "O", 1, 250, None),
            ("ST", "Relevant Clinical Information", "O", 1, 300, None),
            ("TS", "Specimen Received Date/Time", "O", 1, 26, None),
            ("SPS", "Specimen Source", "O", 1, 300, None),
            ("XCN", "Ordering Provider", "O", 0, 250, None),
            ("XTN", "Order Callback Phone Number", "O", 0, 250, None),
            ("ST", "Placer Field 1", "O", 1, 60, None),
            ("ST", "Placer Field 2", "O", 1, 60, None),
            ("ST", "Filler Field 1", "O", 1, 60, None),
            ("ST", "Filler Field 2", "O", 1, 60, None),
            ("TS", "Results Rpt/Status Chng - Date/Time", "O", 1, 26, None),
            ("MOC", "Charge to Practice", "O", 1, 40, None),
            ("ID", "Diagnostic Serv Sect ID", "O", 1, 10, "0074"),
            ("ID", "Result Status", "O", 1, 1, "0123"),
            ("PRL", "Parent Result", "O", 1, 400, None),
            ("TQ", "Quantity/Timing", "O", 0, 200, None),
            ("XCN", "Result Copies To", "O", 0, 250, None),
            ("EIP", "Parent", "O", 1, 200, None),
            ("ID", "Transportation Mode", "O", 1, 20, "0124"),
            ("CE", "Reason for Study", "O", 0, 250, None),
            ("NDL", "Principal Result Interpreter", "O", 1, 200, None),
            ("NDL", "Assistant Result Interpreter", "O", 0, 200, None),
            ("NDL", "Technician", "O", 0, 200, None),
            ("NDL", "Transcriptionist", "O", 0, 200, None),
            ("TS", "Scheduled Date/Time", "O", 1, 26, None),
            ("NM", "Number of Sample Containers", "O", 1, 4, None),
            ("CE", "Transport Logistics of Collected Sample", "O", 0, 250, None),
            ("CE", "Collector's Comment", "O", 0, 250, None),
            ("CE", "Transport Arrangement Responsibility", "O", 1, 250, None),
            ("ID", "Transport Arranged", "O", 1, 30, "0224"),
            ("ID", "Escort Required", "O", 1, 1, "0225"),
            ("CE", "Planned Patient Transport Comment", "O", 0, 250, None),
            ("CE", "Procedure Code", "O", 1, 250, "0088"),
            ("CE", "Procedure Code Modifier", "O", 0, 250, "0340"),
            ("CE", "Placer Supplemental Service Information", "O", 0, 250, "0411"),
            ("CE", "Filler Supplemental Service Information", "O", 0, 250, "0411"),
            (
                "CWE",
                "Medically Necessary Duplicate Procedure Reason",
                "O",
                1,
                250,
                "0476",
            ),
            ("IS", "Result Handling", "O", 1, 2, "0507"),
            ("CWE", "Parent Universal Service Identifier", "O", 1, 250, None),
        ),
    ),
    "OBX": (
        "Observation/Result",
        (
            ("SI", "Set ID - OBX", "O", 1, 4, None),
            ("ID", "Value Type", "O", 1, 2, "0125"),
            ("CE", "Observation Identifier", "R", 1, 250, None),
            ("ST", "Observation Sub-ID", "O", 1, 20, None),
            ("varies", "Observation Value", "O", 0, 99999, None),
            ("CE", "Units", "O", 1, 250, None),
            ("ST", "References Range", "O", 1, 60, None),
            ("IS", "Abnormal Flags", "O", 0, 5, "0078"),
            ("NM", "Probability", "O", 1, 5, None),
            ("ID", "Nature of Abnormal Test", "O", 0, 2, "0080"),
            ("ID", "Observation Result Status", "R", 1, 1, "0085"),
            ("TS", "Effective Date of Reference Range", "O", 1, 26, None),
            ("ST", "User Defined Access Checks", "O", 1, 20, None),
            ("TS", "Date/Time of the Observation", "O", 1, 26, None),
            ("CE", "Producer's ID", "O", 1, 250, None),
            ("XCN", "Responsible Observer", "O", 0, 250, None),
            ("CE", "Observation Method", "O", 0, 250, None),
            ("EI", "Equipment Instance Identifier", "O", 0, 22, None),
            ("TS", "Date/Time of the Analysis", "O", 1, 26, None),
            ("ST", "Reserved for harmonization with V2.6", "B", 1, None, None),
            ("ST", "Reserved for harmonization with V2.6", "B", 1, None, None),
            ("ST", "Reserved for harmonization with V2.6", "B", 1, None, None),
            ("XON", "Performing Organization Name", "O", 0, 567, None),
            ("XAD", "Performing Organization Address", "O", 0, 631, None),
            ("XCN", "Performing Organization Medical Director", "O", 0, 3002, None),
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
            ("ST", "Text Instruction", "O", 1, None, None),
        ),
    ),
    "OM1": (
        "General Segment",
        (
            ("NM", "Sequence Number Test Observation Master File", "R", 1, None, None),
            ("CE", "Producer S Service Test Observation ID", "R", 1, None, "9999"),
            ("ID", "Permitted Data Types", "O", 0, None, "0125"),
            ("ID", "Specimen Required", "R", 1, None, "0136"),
            ("CE", "Producer ID", "R", 1, None, "9999"),
            ("TX", "Observation Description", "O", 1, None, None),
            (
                "CE",
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
                "9999",
            ),
            ("CE", "Coded Representation Of Method", "O", 0, None, "9999"),
            ("ID", "Portable Device Indicator", "O", 1, None, "0136"),
            ("CE", "Observation Producing Department Section", "O", 0, None, "9999"),
            ("XTN", "Telephone Number Of Section", "O", 1, None, None),
            ("IS", "Nature Of Service Test Observation", "R", 1, None, "0174"),
            ("CE", "Report Subheader", "O", 1, None, "9999"),
            ("ST", "Report Display Order", "O", 1, None, None),
            (
                "TS",
                "Date Time Stamp For Any Change In Definition For The Observation",
                "O",
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
                "9999",
            ),
            ("XAD", "Address Of Outside Site S", "O", 0, None, None),
            ("XTN", "Phone Number Of Outside Site", "O", 1, None, None),
            ("CWE", "Confidentiality Code", "O", 1, None, "0177"),
            (
                "CE",
                "Observations Required To Interpret The Observation",
                "O",
                1,
                None,
                "9999",
            ),
            ("TX", "Interpretation Of Observations", "O", 1, None, None),
            ("CE", "Contraindications To Observations", "O", 1, None, "9999"),
            ("CE", "Reflex Tests Observations", "O", 0, None, "9999"),
            ("TX", "Rules That Trigger Reflex Testing", "O", 1, None, None),
            ("CE", "Fixed Canned Message", "O", 1, None, "9999"),
            ("TX", "Patient Preparation", "O", 1, None, None),
            ("CE", "Procedure Medication", "O", 1, None, "9999"),
            ("TX", "Factors That May Affect The Observation", "O", 1, None, None),
            ("ST", "Service Test Observation Performance Schedule", "O", 0, None, None),
            ("TX", "Description Of Test Methods", "O", 1, None, None),
            ("CE", "Kind Of Quantity Observed", "O", 1, None, "0254"),
            ("CE", "Point Versus Interval", "O", 1, None, "0255"),
            ("TX", "Challenge Information", "O", 1, None, "0256"),
            ("CE", "Relationship Modifier", "O", 1, None, "0258"),
            ("CE", "Target Anatomic Site Of Test", "O", 1, None, "9999"),
            ("CE", "Modality Of Imaging Measurement", "O", 1, None, "0259"),
        ),
    ),
    "OM2": (
        "Numeric Observation",
        (
            ("NM", "Sequence Number Test Observation Master File", "O", 1, None, None),
            ("CE", "Units Of Measure", "O", 1, None, "9999"),
            ("NM", "Range Of Decimal Precision", "O", 0, None, None),
            ("CE", "Corresponding Si Units Of Measure", "O", 1, None, "9999"),
            ("TX", "Si Conversion Factor", "O", 1, None, None),
            (
                "RFR",
                "Reference Normal Range Ordinal And Continuous Observations",
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
            ("CE", "Preferred Coding System", "O", 1, None, "9999"),
            ("CE", "Valid Coded Answers", "O", 1, None, "9999"),
            (
                "CE",
                "Normal Text Codes For Categorical Observations",
                "O",
                0,
                None,
                "9999",
            ),
            (
                "CE",
                "Abnormal Text Codes For Categorical Observations",
                "O",
                0,
                None,
                "9999",
            ),
            (
                "CE",
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
            ("CE", "Container Units", "O", 1, None, "9999"),
            ("CE", "Specimen", "O", 1, None, "9999"),
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
                "CE",
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
            ("CE", "Universal Service Identifier", "R", 1, None, None),
            ("CE", "Category Identifier", "O", 0, None, "0412"),
            ("TX", "Category Description", "O", 1, None, None),
            ("ST", "Category Synonym", "O", 0, None, None),
            ("TS", "Effective Test Service Start Date Time", "O", 1, None, None),
            ("TS", "Effective Test Service End Date Time", "O", 1, None, None),
            ("NM", "Test Service Default Duration Quantity", "O", 1, None, None),
            ("CE", "Test Service Default Duration Units", "O", 1, None, "9999"),
            ("IS", "Test Service Default Frequency", "O", 1, None, "0335"),
            ("ID", "Consent Indicator", "O", 1, None, "0136"),
            ("CE", "Consent Identifier", "O", 1, None, "0413"),
            ("TS", "Consent Effective Start Date Time", "O", 1, None, None),
            ("TS", "Consent Effective End Date Time", "O", 1, None, None),
            ("NM", "Consent Interval Quantity", "O", 1, None, None),
            ("CE", "Consent Interval Units", "O", 1, None, "0414"),
            ("NM", "Consent Waiting Period Quantity", "O", 1, None, None),
            ("CE", "Consent Waiting Period Units", "O", 1, None, "0414"),
            ("TS", "Effective Date Time Of Change", "O", 1, None, None),
            ("XCN", "Entered By", "O", 1, None, None),
            ("PL", "Orderable At Location", "O", 0, None, None),
            ("IS", "Formulary Status", "O", 1, None, "0473"),
            ("ID", "Special Order Indicator", "O", 1, None, "0136"),
            ("CE", "Primary Key Value CDM", "O", 0, None, "0132"),
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
            ("TQ", "Quantity/Timing", "O", 0, 200, None),
            ("EIP", "Parent", "O", 1, 200, None),
            ("TS", "Date/Time of Transaction", "O", 1, 26, None),
            ("XCN", "Entered By", "O", 0, 250, None),
            ("XCN", "Verified By", "O", 0, 250, None),
            ("XCN", "Ordering Provider", "O", 0, 250, None),
            ("PL", "Enterer's Location", "O", 1, 80, None),
            ("XTN", "Call Back Phone Number", "O", 0, 250, None),
            ("TS", "Order Effective Date/Time", "O", 1, 26, None),
            ("CE", "Order Control Code Reason", "O", 1, 250, None),
            ("CE", "Entering Organization", "O", 1, 250, None),
            ("CE", "Entering Device", "O", 1, 250, None),
            ("XCN", "Action By", "O", 0, 250, None),
            ("CE", "Advanced Beneficiary Notice Code", "O", 1, 250, "0339"),
            ("XON", "Ordering Facility Name", "O", 0, 250, None),
            ("XAD", "Ordering Facility Address", "O", 0, 250, None),
            ("XTN", "Ordering Facility Phone Number", "O", 0, 250, None),
            ("XAD", "Ordering Provider Address", "O", 0, 250, None),
            ("CWE", "Order Status Modifier", "O", 1, 250, None),
            ("CWE", "Advanced Beneficiary Notice Override Reason", "O", 1, 60, "0552"),
            ("TS", "Filler's Expected Availability Date/Time", "O", 1, 26, None),
            ("CWE", "Confidentiality Code", "O", 1, 250, "0177"),
            ("CWE", "Order Type", "O", 1, 250, "0482"),
            ("CNE", "Enterer Authorization Mode", "O", 1, 250, "0483"),
            ("CWE", "Parent Universal Service Identifier", "O", 1, 250, None),
        ),
    ),
    "ORG": (
        "Practitioner Organization Unit",
        (
            ("SI", "Set ID ORG", "R", 1, None, None),
            ("CE", "Organization Unit Code", "O", 1, None, "0405"),
            ("CE", "Organization Unit Type Code", "O", 1, None, "0474"),
            ("ID", "Primary Org Unit Indicator", "O", 1, None, "0136"),
            ("CX", "Practitioner Org Unit Identifier", "O", 1, None, None),
            ("CE", "Health Care Provider Type Code", "O", 1, None, "0452"),
            ("CE", "Health Care Provider Classification Code", "O", 1, None, "0453"),
            (
                "CE",
                "Health Care Provider Area Of Specialization Code",
                "O",
                1,
                None,
                "0454",
            ),
            ("DR", "Effective Date Range", "O", 1, None, None),
            ("CE", "Employment Status Code", "O", 1, None, "0066"),
            ("ID", "Board Approval Indicator", "O", 1, None, "0136"),
            ("ID", "Primary Care Physician Indicator", "O", 1, None, "0136"),
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
    "PCR": (
        "Possible Causal Relationship",
        (
            ("CE", "Implicated Product", "R", 1, None, None),
            ("IS", "Generic Product", "O", 1, None, "0249"),
            ("CE", "Product Class", "O", 1, None, None),
            ("CQ", "Total Duration Of Therapy", "O", 1, None, None),
            ("TS", "Product Manufacture Date", "O", 1, None, None),
            ("TS", "Product Expiration Date", "O", 1, None, None),
            ("TS", "Product Implantation Date", "O", 1, None, None),
            ("TS", "Product Explantation Date", "O", 1, None, None),
            ("IS", "Single Use Device", "O", 1, None, "0244"),
            ("CE", "Indication For Product Use", "O", 1, None, None),
            ("IS", "Product Problem", "O", 1, None, "0245"),
            ("ST", "Product Serial Lot Number", "O", 0, None, None),
            ("IS", "Product Available For Inspection", "O", 1, None, "0246"),
            ("CE", "Product Evaluation Performed", "O", 1, None, None),
            ("CE", "Product Evaluation Status", "O", 1, None, "0247"),
            ("CE", "Product Evaluation Results", "O", 1, None, None),
            ("ID", "Evaluated Product Source", "O", 1, None, "0248"),
            ("TS", "Date Product Returned To Manufacturer", "O", 1, None, None),
            ("ID", "Device Operator Qualifications", "O", 1, None, "0242"),
            ("ID", "Relatedness Assessment", "O", 1, None, "0250"),
            ("ID", "Action Taken In Response To The Event", "O", 0, None, "0251"),
            ("ID", "Event Causality Observations", "O", 0, None, "0252"),
            ("ID", "Indirect Exposure Mechanism", "O", 0, None, "0253"),
        ),
    ),
    "PD1": (
        "Patient Additional Demographic",
        (
            ("IS", "Living Dependency", "O", 0, 2, "0223"),
            ("IS", "Living Arrangement", "O", 1, 2, "0220"),
            ("XON", "Patient Primary Facility", "O", 0, 250, None),
            ("XCN", "Patient Primary Care Provider Name & ID No.", "O", 0, 250, None),
            ("IS", "Student Indicator", "O", 1, 2, "0231"),
            ("IS", "Handicap", "O", 1, 2, "0295"),
            ("IS", "Living Will Code", "O", 1, 2, "0315"),
            ("IS", "Organ Donor Code", "O", 1, 2, "0316"),
            ("ID", "Separate Bill", "O", 1, 1, "0136"),
            ("CX", "Duplicate Patient", "O", 0, 250, None),
            ("CE", "Publicity Code", "O", 1, 250, "0215"),
            ("ID", "Protection Indicator", "O", 1, 1, "0136"),
            ("DT", "Protection Indicator Effective Date", "O", 1, 8, None),
            ("XON", "Place of Worship", "O", 0, 250, None),
            ("CE", "Advance Directive Code", "O", 0, 250, "0435"),
            ("IS", "Immunization Registry Status", "O", 1, 1, "0441"),
            ("DT", "Immunization Registry Status Effective Date", "O", 1, 8, None),
            ("DT", "Publicity Code Effective Date", "O", 1, 8, None),
            ("IS", "Military Branch", "O", 1, 5, "0140"),
            ("IS", "Military Rank/Grade", "O", 1, 2, "0141"),
            ("IS", "Military Status", "O", 1, 3, "0142"),
        ),
    ),
    "PDA": (
        "Patient Death and Autopsy",
        (
            ("CE", "Death Cause Code", "O", 0, 250, None),
            ("PL", "Death Location", "O", 1, 80, None),
            ("ID", "Death Certified Indicator", "O", 1, 1, "0136"),
            ("TS", "Death Certificate Signed Date/Time", "O", 1, 26, None),
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
            ("CE", "Country", "R", 1, None, None),
            ("ST", "Brand Name", "R", 1, None, None),
            ("ST", "Device Family Name", "O", 1, None, None),
            ("CE", "Generic Name", "O", 1, None, None),
            ("ST", "Model Identifier", "O", 0, None, None),
            ("ST", "Catalogue Identifier", "O", 1, None, None),
            ("ST", "Other Identifier", "O", 0, None, None),
            ("CE", "Product Code", "O", 1, None, None),
            ("ID", "Marketing Basis", "O", 1, None, "0330"),
            ("ST", "Marketing Approval ID", "O", 1, None, None),
            ("CQ", "Labeled Shelf Life", "O", 1, None, None),
            ("CQ", "Expected Shelf Life", "O", 1, None, None),
            ("TS", "Date First Marketed", "O", 1, None, None),
            ("TS", "Date Last Marketed", "O", 1, None, None),
        ),
    ),
    "PEO": (
        "Product Experience Observation",
        (
            ("CE", "Event Identifiers Used", "O", 0, None, None),
            ("CE", "Event Symptom Diagnosis Code", "O", 0, None, None),
            ("TS", "Event Onset Date Time", "R", 1, None, None),
            ("TS", "Event Exacerbation Date Time", "O", 1, None, None),
            ("TS", "Event Improved Date Time", "O", 1, None, None),
            ("TS", "Event Ended Data Time", "O", 1, None, None),
            ("XAD", "Event Location Occurred Address", "O", 0, None, None),
            ("ID", "Event Qualification", "O", 0, None, "0237"),
            ("ID", "Event Serious", "O", 1, None, "0238"),
            ("ID", "Event Expected", "O", 1, None, "0239"),
            ("ID", "Event Outcome", "O", 0, None, "0240"),
            ("ID", "Patient Outcome", "O", 1, None, "0241"),
            ("FT", "Event Description From Others", "O", 0, None, None),
            ("FT", "Event From Original Reporter", "O", 0, None, None),
            ("FT", "Event Description From Patient", "O", 0, None, None),
            ("FT", "Event Description From Practitioner", "O", 0, None, None),
            ("FT", "Event Description From Autopsy", "O", 0, None, None),
            ("CE", "Cause Of Death", "O", 0, None, None),
            ("XPN", "Primary Observer Name", "O", 0, None, None),
            ("XAD", "Primary Observer Address", "O", 0, None, None),
            ("XTN", "Primary Observer Telephone", "O", 0, None, None),
            ("ID", "Primary Observer S Qualification", "O", 1, None, "0242"),
            ("ID", "Confirmation Provided By", "O", 1, None, "0242"),
            ("TS", "Primary Observer Aware Date Time", "O", 1, None, None),
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
            ("TS", "Sender Aware Date Time", "O", 1, None, None),
            ("TS", "Event Report Date", "R", 1, None, None),
            ("ID", "Event Report Timing Type", "O", 0, None, "0234"),
            ("ID", "Event Report Source", "O", 1, None, "0235"),
            ("ID", "Event Reported To", "O", 0, None, "0236"),
        ),
    ),
    "PID": (
        "Patient Identification",
        (
            ("SI", "Set ID - PID", "O", 1, 4, None),
            ("CX", "Patient ID", "O", 1, 20, None),
            ("CX", "Patient Identifier List", "R", 0, 250, None),
            ("CX", "Alternate Patient ID - PID", "O", 0, 20, None),
            ("XPN", "Patient Name", "R", 0, 250, None),
            ("XPN", "Mother's Maiden Name", "O", 0, 250, None),
            ("TS", "Date/Time of Birth", "O", 1, 26, None),
            ("IS", "Administrative Sex", "O", 1, 1, "0001"),
            ("XPN", "Patient Alias", "O", 0, 250, None),
            ("CE", "Race", "O", 0, 250, "0005"),
            ("XAD", "Patient Address", "O", 0, 250, None),
            ("IS", "County Code", "O", 1, 4, "0289"),
            ("XTN", "Phone Number - Home", "O", 0, 250, None),
            ("XTN", "Phone Number - Business", "O", 0, 250, None),
            ("CE", "Primary Language", "O", 1, 250, "0296"),
            ("CE", "Marital Status", "O", 1, 250, "0002"),
            ("CE", "Religion", "O", 1, 250, "0006"),
            ("CX", "Patient Account Number", "O", 1, 250, None),
            ("ST", "SSN Number - Patient", "O", 1, 16, None),
            ("DLN", "Driver's License Number - Patient", "O", 1, 25, None),
            ("CX", "Mother's Identifier", "O", 0, 250, None),
            ("CE", "Ethnic Group", "O", 0, 250, "0189"),
            ("ST", "Birth Place", "O", 1, 250, None),
            ("ID", "Multiple Birth Indicator", "O", 1, 1, "0136"),
            ("NM", "Birth Order", "O", 1, 2, None),
            ("CE", "Citizenship", "O", 0, 250, "0171"),
            ("CE", "Veterans Military Status", "O", 1, 250, "0172"),
            ("CE", "Nationality", "O", 1, 250, "0212"),
            ("TS", "Patient Death Date and Time", "O", 1, 26, None),
            ("ID", "Patient Death Indicator", "O", 1, 1, "0136"),
            ("ID", "Identity Unknown Indicator", "O", 1, 1, "0136"),
            ("IS", "Identity Reliability Code", "O", 0, 20, "0445"),
            ("TS", "Last Update Date/Time", "O", 1, 26, None),
            ("HD", "Last Update Facility", "O", 1, 241, None),
            ("CE", "Species Code", "O", 1, 250, "0446"),
            ("CE", "Breed Code", "O", 1, 250, "0447"),
            ("ST", "Strain", "O", 1, 80, None),
            ("CE", "Production Class Code", "O", 1, 250, "0429"),
            ("CWE", "Tribal Citizenship", "O", 0, 250, "0171"),
        ),
    ),
    "PR1": (
        "Procedures",
        (
            ("SI", "Set ID - PR1", "R", 1, 4, None),
            ("IS", "Procedure Coding Method", "O", 1, 3, "0089"),
            ("CE", "Procedure Code", "R", 1, 250, "0088"),
            ("ST", "Procedure Description", "O", 1, 40, None),
            ("TS", "Procedure Date/Time", "R", 1, 26, None),
            ("IS", "Procedure Functional Type", "O", 1, 2, "0230"),
            ("NM", "Procedure Minutes", "O", 1, 4, None),
            ("XCN", "Anesthesiologist", "O", 0, 250, "0010"),
            ("IS", "Anesthesia Code", "O", 1, 2, "0019"),
            ("NM", "Anesthesia Minutes", "O", 1, 4, None),
            ("XCN", "Surgeon", "O", 0, 250, "0010"),
            ("XCN", "Procedure Practitioner", "O", 0, 250, "0010"),
            ("CE", "Consent Code", "O", 1, 250, "0059"),
            ("ID", "Procedure Priority", "O", 1, 2, "0418"),
            ("CE", "Associated Diagnosis Code", "O", 1, 250, "0051"),
            ("CE", "Procedure Code Modifier", "O", 0, 250, "0340"),
            ("IS", "Procedure DRG Type", "O", 1, 20, "0416"),
            ("CE", "Tissue Type Code", "O", 0, 250, "0417"),
            ("EI", "Procedure Identifier", "O", 1, 427, None),
            ("ID", "Procedure Action Code", "O", 1, 1, "0206"),
        ),
    ),
    "PRA": (
        "Practitioner Detail",
        (
            ("CE", "Primary Key Value PRA", "O", 1, None, "9999"),
            ("CE", "Practitioner Group", "O", 0, None, "0358"),
            ("IS", "Practitioner Category", "O", 0, None, "0186"),
            ("ID", "Provider Billing", "O", 1, None, "0187"),
            ("SPD", "Specialty", "O", 0, None, "0337"),
            ("PLN", "Practitioner ID Numbers", "O", 0, None, "0338"),
            ("PIP", "Privileges", "O", 0, None, None),
            ("DT", "Date Entered Practice", "O", 1, None, None),
            ("CE", "Institution", "O", 1, None, "0537"),
            ("DT", "Date Left Practice", "O", 1, None, None),
            (
                "CE",
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
            ("TS", "Action Date Time", "R", 1, None, None),
            ("CE", "Problem ID", "R", 1, None, None),
            ("EI", "Problem Instance ID", "R", 1, None, None),
            ("EI", "Episode Of Care ID", "O", 1, None, None),
            ("NM", "Problem List Priority", "O", 1, None, None),
            ("TS", "Problem Established Date Time", "O", 1, None, None),
            ("TS", "Anticipated Problem Resolution Date Time", "O", 1, None, None),
            ("TS", "Actual Problem Resolution Date Time", "O", 1, None, None),
            ("CE", "Problem Classification", "O", 1, None, None),
            ("CE", "Problem Management Discipline", "O", 0, None, None),
            ("CE", "Problem Persistence", "O", 1, None, None),
            ("CE", "Problem Confirmation Status", "O", 1, None, None),
            ("CE", "Problem Life Cycle Status", "O", 1, None, None),
            ("TS", "Problem Life Cycle Status Date Time", "O", 1, None, None),
            ("TS", "Problem Date Of Onset", "O", 1, None, None),
            ("ST", "Problem Onset Text", "O", 1, None, None),
            ("CE", "Problem Ranking", "O", 1, None, None),
            ("CE", "Certainty Of Problem", "O", 1, None, None),
            ("NM", "Probability Of Problem 0 1", "O", 1, None, None),
            ("CE", "Individual Awareness Of Problem", "O", 1, None, None),
            ("CE", "Problem Prognosis", "O", 1, None, None),
            ("CE", "Individual Awareness Of Prognosis", "O", 1, None, None),
            (
                "ST",
                "Family Significant Other Awareness Of Problem Prognosis",
                "O",
                1,
                None,
                None,
            ),
            ("CE", "Security Sensitivity", "O", 1, None, None),
        ),
    ),
    "PRC": (
        "Pricing",
        (
            ("CE", "Primary Key Value PRC", "R", 1, None, "0132"),
            ("CE", "Facility ID PRC", "O", 0, None, "0464"),
            ("CE", "Department", "O", 0, None, "0184"),
            ("IS", "Valid Patient Classes", "O", 0, None, "0004"),
            ("CP", "Price", "O", 0, None, None),
            ("ST", "Formula", "O", 0, None, None),
            ("NM", "Minimum Quantity", "O", 1, None, None),
            ("NM", "Maximum Quantity", "O", 1, None, None),
            ("MO", "Minimum Price", "O", 1, None, None),
            ("MO", "Maximum Price", "O", 1, None, None),
            ("TS", "Effective Start Date", "O", 1, None, None),
            ("TS", "Effective End Date", "O", 1, None, None),
            ("IS", "Price Override Flag", "O", 1, None, "0268"),
            ("CE", "Billing Category", "O", 0, None, "0293"),
            ("ID", "Chargeable Flag", "O", 1, None, "0136"),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("MO", "Cost", "O", 1, None, None),
            ("IS", "Charge On Indicator", "O", 1, None, "0269"),
        ),
    ),
    "PRD": (
        "Provider Data",
        (
            ("CE", "Provider Role", "R", 0, None, "0286"),
            ("XPN", "Provider Name", "O", 0, None, None),
            ("XAD", "Provider Address", "O", 0, None, None),
            ("PL", "Provider Location", "O", 1, None, None),
            ("XTN", "Provider Communication Information", "O", 0, None, None),
            ("CE", "Preferred Method Of Contact", "O", 1, None, "0185"),
            ("PLN", "Provider Identifiers", "O", 0, None, None),
            ("TS", "Effective Start Date Of Provider Role", "O", 1, None, None),
            ("TS", "Effective End Date Of Provider Role", "O", 1, None, None),
        ),
    ),
    "PSH": (
        "Product Summary Header",
        (
            ("ST", "Report Type", "R", 1, None, None),
            ("ST", "Report Form Identifier", "O", 1, None, None),
            ("TS", "Report Date", "R", 1, None, None),
            ("TS", "Report Interval Start Date", "O", 1, None, None),
            ("TS", "Report Interval End Date", "O", 1, None, None),
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
                0,
                None,
                None,
            ),
            (
                "NM",
                "Number Of Product Experience Reports Filed By Distributor",
                "O",
                0,
                None,
                None,
            ),
        ),
    ),
    "PTH": (
        "Pathway",
        (
            ("ID", "Action Code", "R", 1, None, "0287"),
            ("CE", "Pathway ID", "R", 1, None, None),
            ("EI", "Pathway Instance ID", "R", 1, None, None),
            ("TS", "Pathway Established Date Time", "R", 1, None, None),
            ("CE", "Pathway Life Cycle Status", "O", 1, None, None),
            ("TS", "Change Pathway Life Cycle Status Date Time", "O", 1, None, None),
        ),
    ),
    "PV1": (
        "Patient Visit",
        (
            ("SI", "Set ID - PV1", "O", 1, 4, None),
            ("IS", "Patient Class", "R", 1, 1, "0004"),
            ("PL", "Assigned Patient Location", "O", 1, 80, None),
            ("IS", "Admission Type", "O", 1, 2, "0007"),
            ("CX", "Preadmit Number", "O", 1, 250, None),
            ("PL", "Prior Patient Location", "O", 1, 80, None),
            ("XCN", "Attending Doctor", "O", 0, 250, "0010"),
            ("XCN", "Referring Doctor", "O", 0, 250, "0010"),
            ("XCN", "Consulting Doctor", "O", 0, 250, "0010"),
            ("IS", "Hospital Service", "O", 1, 3, "0069"),
            ("PL", "Temporary Location", "O", 1, 80, None),
            ("IS", "Preadmit Test Indicator", "O", 1, 2, "0087"),
            ("IS", "Re-admission Indicator", "O", 1, 2, "0092"),
            ("IS", "Admit Source", "O", 1, 6, "0023"),
            ("IS", "Ambulatory Status", "O", 0, 2, "0009"),
            ("IS", "VIP Indicator", "O", 1, 2, "0099"),
            ("XCN", "Admitting Doctor", "O", 0, 250, "0010"),
            ("IS", "Patient Type", "O", 1, 2, "0018"),
            ("CX", "Visit Number", "O", 1, 250, None),
            ("FC", "Financial Class", "O", 0, 50, "0064"),
            ("IS", "Charge Price Indicator", "O", 1, 2, "0032"),
            ("IS", "Courtesy Code", "O", 1, 2, "0045"),
            ("IS", "Credit Rating", "O", 1, 2, "0046"),
            ("IS", "Contract Code", "O", 0, 2, "0044"),
            ("DT", "Contract Effective Date", "O", 0, 8, None),
            ("NM", "Contract Amount", "O", 0, 12, None),
            ("NM", "Contract Period", "O", 0, 3, None),
            ("IS", "Interest Code", "O", 1, 2, "0073"),
            ("IS", "Transfer to Bad Debt Code", "O", 1, 4, "0110"),
            ("DT", "Transfer to Bad Debt Date", "O", 1, 8, None),
            ("IS", "Bad Debt Agency Code", "O", 1, 10, "0021"),
            ("NM", "Bad Debt Transfer Amount", "O", 1, 12, None),
            ("NM", "Bad Debt Recovery Amount", "O", 1, 12, None),
            ("IS", "Delete Account Indicator", "O", 1, 1, "0111"),
            ("DT", "Delete Account Date", "O", 1, 8, None),
            ("IS", "Discharge Disposition", "O", 1, 3, "0112"),
            ("DLD", "Discharged to Location", "O", 1, 47, "0113"),
            ("CE", "Diet Type", "O", 1, 250, "0114"),
            ("IS", "Servicing Facility", "O", 1, 2, "0115"),
            ("IS", "Bed Status", "O", 1, 1, "0116"),
            ("IS", "Account Status", "O", 1, 2, "0117"),
            ("PL", "Pending Location", "O", 1, 80, None),
            ("PL", "Prior Temporary Location", "O", 1, 80, None),
            ("TS", "Admit Date/Time", "O", 1, 26, None),
            ("TS", "Discharge Date/Time", "O", 0, 26, None),
            ("NM", "Current Patient Balance", "O", 1, 12, None),
            ("NM", "Total Charges", "O", 1, 12, None),
            ("NM", "Total Adjustments", "O", 1, 12, None),
            ("NM", "Total Payments", "O", 1, 12, None),
            ("CX", "Alternate Visit ID", "O", 1, 250, "0203"),
            ("IS", "Visit Indicator", "O", 1, 1, "0326"),
            ("XCN", "Other Healthcare Provider", "O", 0, 250, "0010"),
        ),
    ),
    "PV2": (
        "Patient Visit - Additional Information",
        (
            ("PL", "Prior Pending Location", "O", 1, 80, None),
            ("CE", "Accommodation Code", "O", 1, 250, "0129"),
            ("CE", "Admit Reason", "O", 1, 250, None),
            ("CE", "Transfer Reason", "O", 1, 250, None),
            ("ST", "Patient Valuables", "O", 0, 25, None),
            ("ST", "Patient Valuables Location", "O", 1, 25, None),
            ("IS", "Visit User Code", "O", 0, 2, "0130"),
            ("TS", "Expected Admit Date/Time", "O", 1, 26, None),
            ("TS", "Expected Discharge Date/Time", "O", 1, 26, None),
            ("NM", "Estimated Length of Inpatient Stay", "O", 1, 3, None),
            ("NM", "Actual Length of Inpatient Stay", "O", 1, 3, None),
            ("ST", "Visit Description", "O", 1, 50, None),
            ("XCN", "Referral Source Code", "O", 0, 250, None),
            ("DT", "Previous Service Date", "O", 1, 8, None),
            ("ID", "Employment Illness Related Indicator", "O", 1, 1, "0136"),
            ("IS", "Purge Status Code", "O", 1, 1, "0213"),
            ("DT", "Purge Status Date", "O", 1, 8, None),
            ("IS", "Special Program Code", "O", 1, 2, "0214"),
            ("ID", "Retention Indicator", "O", 1, 1, "0136"),
            ("NM", "Expected Number of Insurance Plans", "O", 1, 1, None),
            ("IS", "Visit Publicity Code", "O", 1, 1, "0215"),
            ("ID", "Visit Protection Indicator", "O", 1, 1, "0136"),
            ("XON", "Clinic Organization Name", "O", 0, 250, None),
            ("IS", "Patient Status Code", "O", 1, 2, "0216"),
            ("IS", "Visit Priority Code", "O", 1, 1, "0217"),
            ("DT", "Previous Treatment Date", "O", 1, 8, None),
            ("IS", "Expected Discharge Disposition", "O", 1, 2, "0112"),
            ("DT", "Signature on File Date", "O", 1, 8, None),
            ("DT", "First Similar Illness Date", "O", 1, 8, None),
            ("CE", "Patient Charge Adjustment Code", "O", 1, 250, "0218"),
            ("IS", "Recurring Service Code", "O", 1, 2, "0219"),
            ("ID", "Billing Media Code", "O", 1, 1, "0136"),
            ("TS", "Expected Surgery Date and Time", "O", 1, 26, None),
            ("ID", "Military Partnership Code", "O", 1, 1, "0136"),
            ("ID", "Military Non-Availability Code", "O", 1, 1, "0136"),
            ("ID", "Newborn Baby Indicator", "O", 1, 1, "0136"),
            ("ID", "Baby Detained Indicator", "O", 1, 1, "0136"),
            ("CE", "Mode of Arrival Code", "O", 1, 250, "0430"),
            ("CE", "Recreational Drug Use Code", "O", 0, 250, "0431"),
            ("CE", "Admission Level of Care Code", "O", 1, 250, "0432"),
            ("CE", "Precaution Code", "O", 0, 250, "0433"),
            ("CE", "Patient Condition Code", "O", 1, 250, "0434"),
            ("IS", "Living Will Code", "O", 1, 2, "0315"),
            ("IS", "Organ Donor Code", "O", 1, 2, "0316"),
            ("CE", "Advance Directive Code", "O", 0, 250, "0435"),
            ("DT", "Patient Status Effective Date", "O", 1, 8, None),
            ("TS", "Expected LOA Return Date/Time", "O", 1, 26, None),
            ("TS", "Expected Pre-admission Testing Date/Time", "O", 1, 26, None),
            ("IS", "Notify Clergy Code", "O", 0, 20, "0534"),
        ),
    ),
    "QAK": (
        "Query Acknowledgment",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("ID", "Query Response Status", "O", 1, None, "0208"),
            ("CE", "Message Query Name", "O", 1, None, "0471"),
            ("NM", "Hit Count", "O", 1, None, None),
            ("NM", "This Payload", "O", 1, None, None),
            ("NM", "Hits Remaining", "O", 1, None, None),
        ),
    ),
    "QID": (
        "Query Identification",
        (
            ("ST", "Query Tag", "R", 1, None, None),
            ("CE", "Message Query Name", "R", 1, None, "0471"),
        ),
    ),
    "QPD": (
        "Query Parameter Definition",
        (
            ("CE", "Message Query Name", "R", 1, None, "0471"),
            ("ST", "Query Tag", "O", 1, None, None),
            ("varies", "User Parameters In Successive Fields", "O", 1, None, None),
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
            ("XCN", "Who Subject Filter", "R", 0, None, None),
            ("CE", "What Subject Filter", "R", 0, None, "0048"),
            ("CE", "What Department Data Code", "R", 0, None, None),
            ("VR", "What Data Code Value Qual", "O", 0, None, None),
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
            ("TQ", "When Quantity Timing Qualifier", "O", 1, None, None),
            ("NM", "Search Confidence Threshold", "O", 1, None, None),
        ),
    ),
    "QRI": (
        "Query Response Instance",
        (
            ("NM", "Candidate Confidence", "O", 1, None, None),
            ("IS", "Match Reason Code", "O", 0, None, "0392"),
            ("CE", "Algorithm Descriptor", "O", 1, None, "0393"),
        ),
    ),
    "RCP": (
        "Response Control Parameter",
        (
            ("ID", "Query Priority", "O", 1, None, "0091"),
            ("CQ", "Quantity Limited Request", "O", 1, None, "0126"),
            ("CE", "Response Modality", "O", 1, None, "0394"),
            ("TS", "Execution And Delivery Time", "O", 1, None, None),
            ("ID", "Modify Indicator", "O", 1, None, "0395"),
            ("SRT", "Sort By Field", "O", 0, None, None),
            ("ID", "Segment Group Inclusion", "O", 0, None, None),
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
    "RF1": (
        "Referral Information",
        (
            ("CE", "Referral Status", "O", 1, None, "0283"),
            ("CE", "Referral Priority", "O", 1, None, "0280"),
            ("CE", "Referral Type", "O", 1, None, "0281"),
            ("CE", "Referral Disposition", "O", 0, None, "0282"),
            ("CE", "Referral Category", "O", 1, None, "0284"),
            ("EI", "Originating Referral Identifier", "R", 1, None, None),
            ("TS", "Effective Date", "O", 1, None, None),
            ("TS", "Expiration Date", "O", 1, None, None),
            ("TS", "Process Date", "O", 1, None, None),
            ("CE", "Referral Reason", "O", 0, None, "0336"),
            ("EI", "External Referral Identifier", "O", 0, None, None),
        ),
    ),
    "RGS": (
        "Resource Group",
        (
            ("SI", "Set ID RGS", "R", 1, None, None),
            ("ID", "Segment Action Code", "O", 1, None, "0206"),
            ("CE", "Resource Group ID", "O", 1, None, None),
        ),
    ),
    "RMI": (
        "Risk Management Incident",
        (
            ("CE", "Risk Management Incident Code", "O", 1, None, "0427"),
            ("TS", "Date Time Incident", "O", 1, None, None),
            ("CE", "Incident Type Code", "O", 1, None, "0428"),
        ),
    ),
    "ROL": (
        "Role",
        (
            ("EI", "Role Instance ID", "O", 1, 60, None),
            ("ID", "Action Code", "R", 1, 2, "0287"),
            ("CE", "Role-ROL", "R", 1, 250, "0443"),
            ("XCN", "Role Person", "R", 0, 250, None),
            ("TS", "Role Begin Date/Time", "O", 1, 26, None),
            ("TS", "Role End Date/Time", "O", 1, 26, None),
            ("CE", "Role Duration", "O", 1, 250, None),
            ("CE", "Role Action Reason", "O", 1, 250, None),
            ("CE", "Provider Type", "O", 0, 250, None),
            ("CE", "Organization Unit Type", "O", 1, 250, "0406"),
            ("XAD", "Office/Home Address/Birthplace", "O", 0, 250, None),
            ("XTN", "Phone", "O", 0, 250, None),
        ),
    ),
    "RQ1": (
        "Requisition Detail-1",
        (
            ("ST", "Anticipated Price", "O", 1, None, None),
            ("CE", "Manufacturer Identifier", "O", 1, None, "0385"),
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
            ("IS", "Dept Cost Center", "O", 1, None, "0319"),
            ("IS", "Item Natural Account Code", "O", 1, None, "0320"),
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
            ("CE", "Administered Code", "R", 1, None, "0292"),
            ("NM", "Administered Amount", "R", 1, None, None),
            ("CE", "Administered Units", "O", 1, None, None),
            ("CE", "Administered Dosage Form", "O", 1, None, None),
            ("CE", "Administration Notes", "O", 0, None, None),
            ("XCN", "Administering Provider", "O", 0, None, None),
            ("LA2", "Administered At Location", "O", 1, None, None),
            ("ST", "Administered Per Time Unit", "O", 1, None, None),
            ("NM", "Administered Strength", "O", 1, None, None),
            ("CE", "Administered Strength Units", "O", 1, None, None),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("TS", "Substance Expiration Date", "O", 0, None, None),
            ("CE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CE", "Substance Treatment Refusal Reason", "O", 0, None, None),
            ("CE", "Indication", "O", 0, None, None),
            ("ID", "Completion Status", "O", 1, None, "0322"),
            ("ID", "Action Code RXA", "O", 1, None, "0323"),
            ("TS", "System Entry Date Time", "O", 1, None, None),
            ("NM", "Administered Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Administered Drug Strength Volume Units", "O", 1, None, None),
            ("CWE", "Administered Barcode Identifier", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
        ),
    ),
    "RXC": (
        "Pharmacy/Treatment Component Order",
        (
            ("ID", "Rx Component Type", "R", 1, None, "0166"),
            ("CE", "Component Code", "R", 1, None, None),
            ("NM", "Component Amount", "R", 1, None, None),
            ("CE", "Component Units", "R", 1, None, None),
            ("NM", "Component Strength", "O", 1, None, None),
            ("CE", "Component Strength Units", "O", 1, None, None),
            ("CE", "Supplementary Code", "O", 0, None, None),
            ("NM", "Component Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Component Drug Strength Volume Units", "O", 1, None, None),
        ),
    ),
    "RXD": (
        "Pharmacy/Treatment Dispense",
        (
            ("NM", "Dispense Sub ID Counter", "R", 1, None, None),
            ("CE", "Dispense Give Code", "R", 1, None, "0292"),
            ("TS", "Date Time Dispensed", "R", 1, None, None),
            ("NM", "Actual Dispense Amount", "R", 1, None, None),
            ("CE", "Actual Dispense Units", "O", 1, None, None),
            ("CE", "Actual Dosage Form", "O", 1, None, None),
            ("ST", "Prescription Number", "R", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("ST", "Dispense Notes", "O", 0, None, None),
            ("XCN", "Dispensing Provider", "O", 0, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("LA2", "Dispense To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CE",
                "Pharmacy Treatment Supplier S Special Dispensing Instructions",
                "O",
                0,
                None,
                None,
            ),
            ("NM", "Actual Strength", "O", 1, None, None),
            ("CE", "Actual Strength Unit", "O", 1, None, None),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("TS", "Substance Expiration Date", "O", 0, None, None),
            ("CE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CE", "Indication", "O", 0, None, None),
            ("NM", "Dispense Package Size", "O", 1, None, None),
            ("CE", "Dispense Package Size Unit", "O", 1, None, None),
            ("ID", "Dispense Package Method", "O", 1, None, "0321"),
            ("CE", "Supplementary Code", "O", 0, None, None),
            ("CE", "Initiating Location", "O", 1, None, None),
            ("CE", "Packaging Assembly Location", "O", 1, None, None),
            ("NM", "Actual Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Actual Drug Strength Volume Units", "O", 1, None, None),
            ("CWE", "Dispense To Pharmacy", "O", 1, None, None),
            ("XAD", "Dispense To Pharmacy Address", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("CWE", "Dispense Type", "O", 1, None, "0484"),
        ),
    ),
    "RXE": (
        "Pharmacy/Treatment Encoded Order",
        (
            ("TQ", "Quantity Timing", "O", 1, None, None),
            ("CE", "Give Code", "R", 1, None, "0292"),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CE", "Give Units", "R", 1, None, None),
            ("CE", "Give Dosage Form", "O", 1, None, None),
            ("CE", "Provider S Administration Instructions", "O", 0, None, None),
            ("LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("NM", "Dispense Amount", "O", 1, None, None),
            ("CE", "Dispense Units", "O", 1, None, None),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("XCN", "Ordering Provider S DEA Number", "O", 0, None, None),
            ("XCN", "Pharmacist Treatment Supplier S Verifier ID", "O", 0, None, None),
            ("ST", "Prescription Number", "O", 1, None, None),
            ("NM", "Number Of Refills Remaining", "O", 1, None, None),
            ("NM", "Number Of Refills Doses Dispensed", "O", 1, None, None),
            ("TS", "D T Of Most Recent Refill Or Dose Dispensed", "O", 1, None, None),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CE",
                "Pharmacy Treatment Supplier S Special Dispensing Instructions",
                "O",
                0,
                None,
                None,
            ),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("ST", "Give Rate Amount", "O", 1, None, None),
            ("CE", "Give Rate Units", "O", 1, None, None),
            ("NM", "Give Strength", "O", 1, None, None),
            ("CE", "Give Strength Units", "O", 1, None, None),
            ("CE", "Give Indication", "O", 0, None, None),
            ("NM", "Dispense Package Size", "O", 1, None, None),
            ("CE", "Dispense Package Size Unit", "O", 1, None, None),
            ("ID", "Dispense Package Method", "O", 1, None, "0321"),
            ("CE", "Supplementary Code", "O", 0, None, None),
            ("TS", "Original Order Date Time", "O", 1, None, None),
            ("NM", "Give Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Give Drug Strength Volume Units", "O", 1, None, None),
            ("CWE", "Controlled Substance Schedule", "O", 1, None, "0477"),
            ("ID", "Formulary Status", "O", 1, None, "0478"),
            ("CWE", "Pharmaceutical Substance Alternative", "O", 0, None, None),
            ("CWE", "Pharmacy Of Most Recent Fill", "O", 1, None, None),
            ("NM", "Initial Dispense Amount", "O", 1, None, None),
            ("CWE", "Dispensing Pharmacy", "O", 1, None, None),
            ("XAD", "Dispensing Pharmacy Address", "O", 1, None, None),
            ("PL", "Deliver To Patient Location", "O", 1, None, None),
            ("XAD", "Deliver To Address", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
        ),
    ),
    "RXG": (
        "Pharmacy/Treatment Give",
        (
            ("NM", "Give Sub ID Counter", "R", 1, None, None),
            ("NM", "Dispense Sub ID Counter", "O", 1, None, None),
            ("TQ", "Quantity Timing", "O", 1, None, None),
            ("CE", "Give Code", "R", 1, None, "0292"),
            ("NM", "Give Amount Minimum", "R", 1, None, None),
            ("NM", "Give Amount Maximum", "O", 1, None, None),
            ("CE", "Give Units", "R", 1, None, None),
            ("CE", "Give Dosage Form", "O", 1, None, None),
            ("CE", "Administration Notes", "O", 0, None, None),
            ("ID", "Substitution Status", "O", 1, None, "0167"),
            ("LA2", "Dispense To Location", "O", 1, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            (
                "CE",
                "Pharmacy Treatment Supplier S Special Administration Instructions",
                "O",
                0,
                None,
                None,
            ),
            ("ST", "Give Per Time Unit", "O", 1, None, None),
            ("ST", "Give Rate Amount", "O", 1, None, None),
            ("CE", "Give Rate Units", "O", 1, None, None),
            ("NM", "Give Strength", "O", 1, None, None),
            ("CE", "Give Strength Units", "O", 1, None, None),
            ("ST", "Substance Lot Number", "O", 0, None, None),
            ("TS", "Substance Expiration Date", "O", 0, None, None),
            ("CE", "Substance Manufacturer Name", "O", 0, None, "0227"),
            ("CE", "Indication", "O", 0, None, None),
            ("NM", "Give Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Give Drug Strength Volume Units", "O", 1, None, None),
            ("CWE", "Give Barcode Identifier", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
        ),
    ),
    "RXO": (
        "Pharmacy/Treatment Order",
        (
            ("CE", "Requested Give Code", "O", 1, None, None),
            ("NM", "Requested Give Amount Minimum", "O", 1, None, None),
            ("NM", "Requested Give Amount Maximum", "O", 1, None, None),
            ("CE", "Requested Give Units", "O", 1, None, None),
            ("CE", "Requested Dosage Form", "O", 1, None, None),
            ("CE", "Provider S Pharmacy Treatment Instructions", "O", 0, None, None),
            ("CE", "Provider S Administration Instructions", "O", 0, None, None),
            ("LA1", "Deliver To Location", "O", 1, None, None),
            ("ID", "Allow Substitutions", "O", 1, None, "0161"),
            ("CE", "Requested Dispense Code", "O", 1, None, None),
            ("NM", "Requested Dispense Amount", "O", 1, None, None),
            ("CE", "Requested Dispense Units", "O", 1, None, None),
            ("NM", "Number Of Refills", "O", 1, None, None),
            ("XCN", "Ordering Provider S DEA Number", "O", 0, None, None),
            ("XCN", "Pharmacist Treatment Supplier S Verifier ID", "O", 0, None, None),
            ("ID", "Needs Human Review", "O", 1, None, "0136"),
            ("ST", "Requested Give Per Time Unit", "O", 1, None, None),
            ("NM", "Requested Give Strength", "O", 1, None, None),
            ("CE", "Requested Give Strength Units", "O", 1, None, None),
            ("CE", "Indication", "O", 0, None, None),
            ("ST", "Requested Give Rate Amount", "O", 1, None, None),
            ("CE", "Requested Give Rate Units", "O", 1, None, None),
            ("CQ", "Total Daily Dose", "O", 1, None, None),
            ("CE", "Supplementary Code", "O", 0, None, None),
            ("NM", "Requested Drug Strength Volume", "O", 1, None, None),
            ("CWE", "Requested Drug Strength Volume Units", "O", 1, None, None),
            ("ID", "Pharmacy Order Type", "O", 1, None, "0480"),
            ("NM", "Dispensing Interval", "O", 1, None, None),
        ),
    ),
    "RXR": (
        "Pharmacy/Treatment Route",
        (
            ("CE", "Route", "R", 1, None, "0162"),
            ("CWE", "Administration Site", "O", 1, None, "0163"),
            ("CE", "Administration Device", "O", 1, None, "0164"),
            ("CWE", "Administration Method", "O", 1, None, "0165"),
            ("CE", "Routing Instruction", "O", 1, None, None),
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
            ("SPS", "Specimen Source", "O", 1, None, None),
            ("TS", "Registration Date Time", "O", 1, None, None),
            ("CE", "Container Status", "O", 1, None, "0370"),
            ("CE", "Carrier Type", "O", 1, None, "0378"),
            ("EI", "Carrier Identifier", "O", 1, None, None),
            ("NA", "Position In Carrier", "O", 1, None, None),
            ("CE", "Tray Type SAC", "O", 1, None, "0379"),
            ("EI", "Tray Identifier", "O", 1, None, None),
            ("NA", "Position In Tray", "O", 1, None, None),
            ("CE", "Location", "O", 0, None, None),
            ("NM", "Container Height", "O", 1, None, None),
            ("NM", "Container Diameter", "O", 1, None, None),
            ("NM", "Barrier Delta", "O", 1, None, None),
            ("NM", "Bottom Delta", "O", 1, None, None),
            ("CE", "Container Height Diameter Delta Units", "O", 1, None, None),
            ("NM", "Container Volume", "O", 1, None, None),
            ("NM", "Available Specimen Volume", "O", 1, None, None),
            ("NM", "Initial Specimen Volume", "O", 1, None, None),
            ("CE", "Volume Units", "O", 1, None, None),
            ("CE", "Separator Type", "O", 1, None, "0380"),
            ("CE", "Cap Type", "O", 1, None, "0381"),
            ("CWE", "Additive", "O", 0, None, "0371"),
            ("CE", "Specimen Component", "O", 1, None, None),
            ("SN", "Dilution Factor", "O", 1, None, None),
            ("CE", "Treatment", "O", 1, None, "0373"),
            ("SN", "Temperature", "O", 1, None, None),
            ("NM", "Hemolysis Index", "O", 1, None, None),
            ("CE", "Hemolysis Index Units", "O", 1, None, None),
            ("NM", "Lipemia Index", "O", 1, None, None),
            ("CE", "Lipemia Index Units", "O", 1, None, None),
            ("NM", "Icterus Index", "O", 1, None, None),
            ("CE", "Icterus Index Units", "O", 1, None, None),
            ("NM", "Fibrin Index", "O", 1, None, None),
            ("CE", "Fibrin Index Units", "O", 1, None, None),
            ("CE", "System Induced Contaminants", "O", 0, None, "0374"),
            ("CE", "Drug Interference", "O", 0, None, "0382"),
            ("CE", "Artificial Blood", "O", 1, None, "0375"),
            ("CWE", "Special Handling Code", "O", 0, None, "0376"),
            ("CE", "Other Environmental Factors", "O", 0, None, "0377"),
        ),
    ),
    "SCH": (
        "Scheduling Activity Information",
        (
            ("EI", "Placer Appointment ID", "O", 1, None, None),
            ("EI", "Filler Appointment ID", "O", 1, None, None),
            ("NM", "Occurrence Number", "O", 1, None, None),
            ("EI", "Placer Group Number", "O", 1, None, None),
            ("CE", "Schedule ID", "O", 1, None, None),
            ("CE", "Event Reason", "R", 1, None, None),
            ("CE", "Appointment Reason", "O", 1, None, "0276"),
            ("CE", "Appointment Type", "O", 1, None, "0277"),
            ("NM", "Appointment Duration", "O", 1, None, None),
            ("CE", "Appointment Duration Units", "O", 1, None, None),
            ("TQ", "Appointment Timing Quantity", "O", 0, None, None),
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
            ("CE", "Filler Status Code", "O", 1, None, "0278"),
            ("EI", "Placer Order Number", "O", 0, None, None),
            ("EI", "Filler Order Number", "O", 0, None, None),
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
            ("TS", "Software Install Date", "O", 1, 26, None),
        ),
    ),
    "SID": (
        "Substance Identifier",
        (
            ("CE", "Application Method Identifier", "O", 1, None, None),
            ("ST", "Substance Lot Number", "O", 1, None, None),
            ("ST", "Substance Container Identifier", "O", 1, None, None),
            ("CE", "Substance Manufacturer Identifier", "O", 1, None, "0385"),
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
            ("CWE", "Specimen Source Site", "O", 1, 250, None),
            ("CWE", "Specimen Source Site Modifier", "O", 0, 250, "0542"),
            ("CWE", "Specimen Collection Site", "O", 1, 250, "0543"),
            ("CWE", "Specimen Role", "O", 0, 250, "0369"),
            ("CQ", "Specimen Collection Amount", "O", 1, 20, None),
            ("NM", "Grouped Specimen Count", "O", 1, 6, None),
            ("ST", "Specimen Description", "O", 0, 250, None),
            ("CWE", "Specimen Handling Code", "O", 0, 250, "0376"),
            ("CWE", "Specimen Risk Code", "O", 0, 250, "0489"),
            ("DR", "Specimen Collection Date/Time", "O", 1, 26, None),
            ("TS", "Specimen Received Date/Time", "O", 1, 26, None),
            ("TS", "Specimen Expiration Date/Time", "O", 1, 26, None),
            ("ID", "Specimen Availability", "O", 1, 1, "0136"),
            ("CWE", "Specimen Reject Reason", "O", 0, 250, "0490"),
            ("CWE", "Specimen Quality", "O", 1, 250, "0491"),
            ("CWE", "Specimen Appropriateness", "O", 1, 250, "0492"),
            ("CWE", "Specimen Condition", "O", 0, 250, "0493"),
            ("CQ", "Specimen Current Quantity", "O", 1, 20, None),
            ("NM", "Number of Specimen Containers", "O", 1, 4, None),
            ("CWE", "Container Type", "O", 1, 250, None),
            ("CWE", "Container Condition", "O", 1, 250, "0544"),
            ("CWE", "Specimen Child Role", "O", 1, 250, "0494"),
        ),
    ),
    "SPR": (
        "Stored Procedure Request Definition",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("ID", "Query Response Format Code", "R", 1, None, "0106"),
            ("CE", "Stored Procedure Name", "R", 1, None, None),
            ("QIP", "Input Parameter List", "O", 0, None, None),
        ),
    ),
    "STF": (
        "Staff Identification",
        (
            ("CE", "Primary Key Value STF", "O", 1, None, "9999"),
            ("CX", "Staff Identifier List", "O", 0, None, None),
            ("XPN", "Staff Name", "O", 0, None, None),
            ("IS", "Staff Type", "O", 0, None, "0182"),
            ("IS", "Administrative Sex", "O", 1, None, "0001"),
            ("TS", "Date Time Of Birth", "O", 1, None, None),
            ("ID", "Active Inactive Flag", "O", 1, None, "0183"),
            ("CE", "Department", "O", 0, None, "0184"),
            ("CE", "Hospital Service STF", "O", 0, None, "0069"),
            ("XTN", "Phone", "O", 0, None, None),
            ("XAD", "Office Home Address Birthplace", "O", 0, None, None),
            ("DIN", "Institution Activation Date", "O", 0, None, "0537"),
            ("DIN", "Institution Inactivation Date", "O", 0, None, "0537"),
            ("CE", "Backup Person ID", "O", 0, None, None),
            ("ST", "E Mail Address", "O", 0, None, None),
            ("CE", "Preferred Method Of Contact", "O", 1, None, "0185"),
            ("CE", "Marital Status", "O", 1, None, "0002"),
            ("ST", "Job Title", "O", 1, None, None),
            ("JCC", "Job Code Class", "O", 1, None, None),
            ("CE", "Employment Status Code", "O", 1, None, "0066"),
            ("ID", "Additional Insured On Auto", "O", 1, None, "0136"),
            ("DLN", "Driver S License Number Staff", "O", 1, None, None),
            ("ID", "Copy Auto Ins", "O", 1, None, "0136"),
            ("DT", "Auto Ins Expires", "O", 1, None, None),
            ("DT", "Date Last Dmv Review", "O", 1, None, None),
            ("DT", "Date Next Dmv Review", "O", 1, None, None),
            ("CE", "Race", "O", 1, None, "0005"),
            ("CE", "Ethnic Group", "O", 1, None, "0189"),
            ("ID", "Re Activation Approval Indicator", "O", 1, None, "0136"),
            ("CE", "Citizenship", "O", 0, None, "0171"),
            ("TS", "Death Date And Time", "O", 1, None, None),
            ("ID", "Death Indicator", "O", 1, None, "0136"),
            ("CWE", "Institution Relationship Type Code", "O", 1, None, "0538"),
            ("DR", "Institution Relationship Period", "O", 1, None, None),
            ("DT", "Expected Return Date", "O", 1, None, None),
            ("CWE", "Cost Center Code", "O", 0, None, "0539"),
            ("ID", "Generic Classification Indicator", "O", 1, None, "0136"),
            ("CWE", "Inactive Reason Code", "O", 1, None, "0540"),
        ),
    ),
    "TCC": (
        "Test Code Configuration",
        (
            ("CE", "Universal Service Identifier", "R", 1, None, None),
            ("EI", "Test Application Identifier", "R", 1, None, None),
            ("SPS", "Specimen Source", "O", 1, None, None),
            ("SN", "Auto Dilution Factor Default", "O", 1, None, None),
            ("SN", "Rerun Dilution Factor Default", "O", 1, None, None),
            ("SN", "Pre Dilution Factor Default", "O", 1, None, None),
            ("SN", "Endogenous Content Of Pre Dilution Diluent", "O", 1, None, None),
            ("NM", "Inventory Limits Warning Level", "O", 1, None, None),
            ("ID", "Automatic Rerun Allowed", "O", 1, None, "0136"),
            ("ID", "Automatic Repeat Allowed", "O", 1, None, "0136"),
            ("ID", "Automatic Reflex Allowed", "O", 1, None, "0136"),
            ("SN", "Equipment Dynamic Range", "O", 1, None, None),
            ("CE", "Units", "O", 1, None, None),
            ("CE", "Processing Type", "O", 1, None, "0388"),
        ),
    ),
    "TCD": (
        "Test Code Detail",
        (
            ("CE", "Universal Service Identifier", "R", 1, None, None),
            ("SN", "Auto Dilution Factor", "O", 1, None, None),
            ("SN", "Rerun Dilution Factor", "O", 1, None, None),
            ("SN", "Pre Dilution Factor", "O", 1, None, None),
            ("SN", "Endogenous Content Of Pre Dilution Diluent", "O", 1, None, None),
            ("ID", "Automatic Repeat Allowed", "O", 1, None, "0136"),
            ("ID", "Reflex Allowed", "O", 1, None, "0136"),
            ("CE", "Analyte Repeat Status", "O", 1, None, "0389"),
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
            ("TS", "Start date/time", "O", 1, 26, None),
            ("TS", "End date/time", "O", 1, 26, None),
            ("CWE", "Priority", "O", 0, 250, "0485"),
            ("TX", "Condition text", "O", 1, 250, None),
            ("TX", "Text instruction", "O", 1, 250, None),
            ("ID", "Conjunction", "O", 1, 10, "0427"),
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
            ("IS", "Document Type", "R", 1, None, "0270"),
            ("ID", "Document Content Presentation", "O", 1, None, "0191"),
            ("TS", "Activity Date Time", "O", 1, None, None),
            ("XCN", "Primary Activity Provider Code Name", "O", 0, None, None),
            ("TS", "Origination Date Time", "O", 1, None, None),
            ("TS", "Transcription Date Time", "O", 1, None, None),
            ("TS", "Edit Date Time", "O", 0, None, None),
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
            ("PPN", "Authentication Person Time Stamp", "O", 0, None, None),
            (
                "XCN",
                "Distributed Copies Code And Name Of Recipients",
                "O",
                0,
                None,
                None,
            ),
        ),
    ),
    "UB1": (
        "UB82",
        (
            ("SI", "Set ID - UB1", "O", 1, 4, None),
            ("NM", "Blood Deductible (43)", "O", 1, 1, None),
            ("NM", "Blood Furnished-Pints Of (40)", "O", 1, 2, None),
            ("NM", "Blood Replaced-Pints (41)", "O", 1, 2, None),
            ("NM", "Blood Not Replaced-Pints(42)", "O", 1, 2, None),
            ("NM", "Co-Insurance Days (25)", "O", 1, 2, None),
            ("IS", "Condition Code (35-39)", "O", 0, 14, "0043"),
            ("NM", "Covered Days - (23)", "O", 1, 3, None),
            ("NM", "Non Covered Days - (24)", "O", 1, 3, None),
            ("UVC", "Value Amount & Code (46-49)", "O", 0, 41, None),
            ("NM", "Number Of Grace Days (90)", "O", 1, 2, None),
            ("CE", "Special Program Indicator (44)", "O", 1, 250, "0348"),
            ("CE", "PSRO/UR Approval Indicator (87)", "O", 1, 250, "0349"),
            ("DT", "PSRO/UR Approved Stay-Fm (88)", "O", 1, 8, None),
            ("DT", "PSRO/UR Approved Stay-To (89)", "O", 1, 8, None),
            ("OCD", "Occurrence (28-32)", "O", 0, 259, None),
            ("CE", "Occurrence Span (33)", "O", 1, 250, "0351"),
            ("DT", "Occur Span Start Date(33)", "O", 1, 8, None),
            ("DT", "Occur Span End Date (33)", "O", 1, 8, None),
            ("ST", "UB-82 Locator 2", "O", 1, 30, None),
            ("ST", "UB-82 Locator 9", "O", 1, 7, None),
            ("ST", "UB-82 Locator 27", "O", 1, 8, None),
            ("ST", "UB-82 Locator 45", "O", 1, 17, None),
        ),
    ),
    "UB2": (
        "UB92 Data",
        (
            ("SI", "Set ID - UB2", "O", 1, 4, None),
            ("ST", "Co-Insurance Days (9)", "O", 1, 3, None),
            ("IS", "Condition Code (24-30)", "O", 0, 2, "0043"),
            ("ST", "Covered Days (7)", "O", 1, 3, None),
            ("ST", "Non-Covered Days (8)", "O", 1, 4, None),
            ("UVC", "Value Amount & Code", "O", 0, 41, None),
            ("OCD", "Occurrence Code & Date (32-35)", "O", 0, 259, None),
            ("OSP", "Occurrence Span Code/Dates (36)", "O", 0, 268, None),
            ("ST", "UB92 Locator 2 (State)", "O", 0, 29, None),
            ("ST", "UB92 Locator 11 (State)", "O", 0, 12, None),
            ("ST", "UB92 Locator 31 (National)", "O", 1, 5, None),
            ("ST", "Document Control Number", "O", 0, 23, None),
            ("ST", "UB92 Locator 49 (National)", "O", 0, 4, None),
            ("ST", "UB92 Locator 56 (State)", "O", 0, 14, None),
            ("ST", "UB92 Locator 57 (National)", "O", 1, 27, None),
            ("ST", "UB92 Locator 78 (State)", "O", 0, 2, None),
            ("NM", "Special Visit Count", "O", 1, 3, None),
        ),
    ),
    "URD": (
        "Results/Update Definition",
        (
            ("TS", "R U Date Time", "O", 1, None, None),
            ("ID", "Report Priority", "O", 1, None, "0109"),
            ("XCN", "R U Who Subject Definition", "R", 0, None, None),
            ("CE", "R U What Subject Definition", "O", 0, None, "0048"),
            ("CE", "R U What Department Code", "O", 0, None, None),
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
            ("TQ", "R U Quantity Timing Qualifier", "O", 1, None, None),
        ),
    ),
    "VAR": (
        "Variance",
        (
            ("EI", "Variance Instance ID", "R", 1, None, None),
            ("TS", "Documented Date Time", "R", 1, None, None),
            ("TS", "Stated Variance Date Time", "O", 1, None, None),
            ("XCN", "Variance Originator", "O", 0, None, None),
            ("CE", "Variance Classification", "O", 1, None, None),
            ("ST", "Variance Description", "O", 0, None, None),
        ),
    ),
    "VTQ": (
        "Virtual Table Query Request",
        (
            ("ST", "Query Tag", "O", 1, None, None),
            ("ID", "Query Response Format Code", "R", 1, None, "0106"),
            ("CE", "Vt Query Name", "R", 1, None, None),
            ("CE", "Virtual Table Name", "R", 1, None, None),
            ("QSC", "Selection Criteria", "O", 0, None, None),
        ),
    ),
}
