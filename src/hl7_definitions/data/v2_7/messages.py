# src/hl7_definitions/data/v2_7/messages.py
"""HL7 v2.7 message structures."""

_ADT_A01 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, 1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
    ),
    ("GT1", "Guarantor", 0, -1),
    (
        "INSURANCE",
        "Insurance",
        0,
        -1,
        (
            ("IN1", "Insurance", 1, 1),
            ("IN2", "Insurance Additional Information", 0, 1),
            ("IN3", "Insurance Additional Information, Certification", 0, -1),
            ("ROL", "Role", 0, -1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("UB1", "UB82", 0, 1),
    ("UB2", "UB92 Data", 0, 1),
    ("PDA", "Patient Death and Autopsy", 0, 1),
)

_ADT_A05 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, 1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
    ),
    ("GT1", "Guarantor", 0, -1),
    (
        "INSURANCE",
        "Insurance",
        0,
        -1,
        (
            ("IN1", "Insurance", 1, 1),
            ("IN2", "Insurance Additional Information", 0, 1),
            ("IN3", "Insurance Additional Information, Certification", 0, -1),
            ("ROL", "Role", 0, -1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("UB1", "UB82", 0, 1),
    ("UB2", "UB92 Data", 0, 1),
)

_ADT_A06 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("MRG", "Merge Patient Information", 0, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("ARV", "Access Restriction", 0, -1),
    ("ROL", "Role", 0, -1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, 1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
    ),
    ("GT1", "Guarantor", 0, -1),
    (
        "INSURANCE",
        "Insurance",
        0,
        -1,
        (
            ("IN1", "Insurance", 1, 1),
            ("IN2", "Insurance Additional Information", 0, 1),
            ("IN3", "Insurance Additional Information, Certification", 0, -1),
            ("ROL", "Role", 0, -1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("UB1", "UB82", 0, 1),
    ("UB2", "UB92 Data", 0, 1),
)

_ADT_A09 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
)

_ADT_A21 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
)

_ADT_A39 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    (
        "PATIENT",
        "Patient",
        1,
        -1,
        (
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("MRG", "Merge Patient Information", 1, 1),
            ("PV1", "Patient Visit", 0, 1),
        ),
    ),
)

_ADT_A50 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("MRG", "Merge Patient Information", 1, 1),
    ("PV1", "Patient Visit", 1, 1),
)

_ADT_A52 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
)

_ADT_A61 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("ROL", "Role", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("ROL", "Role", 0, -1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
)

_CRM_C01 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    (
        "PATIENT",
        "Patient",
        1,
        -1,
        (
            ("PID", "Patient Identification", 1, 1),
            ("PRT", "Participation Information", 0, -1),
            (
                "PATIENT_VISIT",
                "Patient Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            ("CSR", "Clinical Study Registration", 1, 1),
            ("CSP", "Clinical Study Phase", 0, -1),
        ),
    ),
)

_CSU_C09 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    (
        "PATIENT",
        "Patient",
        1,
        -1,
        (
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PRT", "Participation Information", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "VISIT",
                "Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            ("CSR", "Clinical Study Registration", 1, 1),
            (
                "STUDY_PHASE",
                "Study Phase",
                1,
                -1,
                (
                    ("CSP", "Clinical Study Phase", 0, 1),
                    (
                        "STUDY_SCHEDULE",
                        "Study Schedule",
                        1,
                        -1,
                        (
                            ("CSS", "Clinical Study Data Schedule Segment", 0, 1),
                            (
                                "STUDY_OBSERVATION",
                                "Study Observation",
                                1,
                                -1,
                                (
                                    ("ORC", "Common Order", 0, 1),
                                    ("OBR", "Observation Request", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING_QTY",
                                        "Timing Qty",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "STUDY_PHARM",
                                "Study Pharm",
                                1,
                                -1,
                                (
                                    (
                                        "COMMON_ORDER",
                                        "Common Order",
                                        0,
                                        1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "RX_ADMIN",
                                        "Rx Admin",
                                        1,
                                        -1,
                                        (
                                            (
                                                "RXA",
                                                "Pharmacy/Treatment Administration",
                                                1,
                                                1,
                                            ),
                                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_MDM_T01 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PV1", "Patient Visit", 1, 1),
    (
        "COMMON_ORDER",
        "Common Order",
        0,
        -1,
        (
            ("ORC", "Common Order", 1, 1),
            (
                "TIMING",
                "Timing",
                0,
                -1,
                (
                    ("TQ1", "Timing/Quantity", 1, 1),
                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                ),
            ),
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    ("TXA", "Transcription Document Header", 1, 1),
    ("CON", "Consent Segment", 0, -1),
)

_MDM_T02 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PV1", "Patient Visit", 1, 1),
    (
        "COMMON_ORDER",
        "Common Order",
        0,
        -1,
        (
            ("ORC", "Common Order", 1, 1),
            (
                "TIMING",
                "Timing",
                0,
                -1,
                (
                    ("TQ1", "Timing/Quantity", 1, 1),
                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                ),
            ),
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    ("TXA", "Transcription Document Header", 1, 1),
    ("CON", "Consent Segment", 0, -1),
    (
        "OBSERVATION",
        "Observation",
        1,
        -1,
        (("OBX", "Observation/Result", 1, 1), ("NTE", "Notes and Comments", 0, -1)),
    ),
)

_PEX_P07 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("PRT", "Participation Information", 0, -1),
    ("NTE", "Notes and Comments", 0, -1),
    (
        "VISIT",
        "Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("PRT", "Participation Information", 0, -1),
        ),
    ),
    (
        "EXPERIENCE",
        "Experience",
        1,
        -1,
        (
            ("PES", "Product Experience Sender", 1, 1),
            (
                "PEX_OBSERVATION",
                "Pex Observation",
                1,
                -1,
                (
                    ("PEO", "Product Experience Observation", 1, 1),
                    (
                        "PEX_CAUSE",
                        "Pex Cause",
                        1,
                        -1,
                        (
                            ("PCR", "Possible Causal Relationship", 1, 1),
                            (
                                "RX_ORDER",
                                "Rx Order",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING_QTY",
                                        "Timing Qty",
                                        1,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 0, -1),
                                ),
                            ),
                            (
                                "RX_ADMINISTRATION",
                                "Rx Administration",
                                0,
                                -1,
                                (
                                    ("RXA", "Pharmacy/Treatment Administration", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 0, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("PRB", "Problem Details", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "ASSOCIATED_PERSON",
                                "Associated Person",
                                0,
                                1,
                                (
                                    ("NK1", "Next of Kin / Associated Parties", 1, 1),
                                    (
                                        "ASSOCIATED_RX_ORDER",
                                        "Associated Rx Order",
                                        0,
                                        1,
                                        (
                                            (
                                                "RXE",
                                                "Pharmacy/Treatment Encoded Order",
                                                1,
                                                1,
                                            ),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "NK1_TIMING_QTY",
                                                "NK1 Timing Qty",
                                                1,
                                                -1,
                                                (
                                                    ("TQ1", "Timing/Quantity", 1, 1),
                                                    (
                                                        "TQ2",
                                                        "Timing/Quantity Relationship",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            ("RXR", "Pharmacy/Treatment Route", 0, -1),
                                        ),
                                    ),
                                    (
                                        "ASSOCIATED_RX_ADMIN",
                                        "Associated Rx Admin",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXA",
                                                "Pharmacy/Treatment Administration",
                                                1,
                                                1,
                                            ),
                                            ("RXR", "Pharmacy/Treatment Route", 0, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    ("PRB", "Problem Details", 0, -1),
                                    (
                                        "ASSOCIATED_OBSERVATION",
                                        "Associated Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "STUDY",
                                "Study",
                                0,
                                -1,
                                (
                                    ("CSR", "Clinical Study Registration", 1, 1),
                                    ("CSP", "Clinical Study Phase", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_PGL_PC6 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("PID", "Patient Identification", 1, 1),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    (
        "GOAL",
        "Goal",
        1,
        -1,
        (
            ("GOL", "Goal Detail", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("VAR", "Variance", 0, -1),
            (
                "GOAL_ROLE",
                "Goal Role",
                0,
                -1,
                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (("PTH", "Pathway", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "OBSERVATION",
                "Observation",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "PROBLEM_ROLE",
                        "Problem Role",
                        0,
                        -1,
                        (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                    ),
                    (
                        "PROBLEM_OBSERVATION",
                        "Problem Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            (
                                "CHOICE",
                                "Choice",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "ORDER_OBSERVATION",
                                "Order Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_PMU_B01 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("STF", "Staff Identification", 1, 1),
    ("PRA", "Practitioner Detail", 0, -1),
    ("ORG", "Practitioner Organization Unit", 0, -1),
    ("AFF", "Professional Affiliation", 0, -1),
    ("LAN", "Language Detail", 0, -1),
    ("EDU", "Educational Detail", 0, -1),
    ("CER", "Certificate Detail", 0, -1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("ROL", "Role", 0, -1),
)

_PMU_B04 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("EVN", "Event Type", 1, 1),
    ("STF", "Staff Identification", 1, 1),
    ("PRA", "Practitioner Detail", 0, -1),
    ("ORG", "Practitioner Organization Unit", 0, -1),
)

_PPG_PCG = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("PID", "Patient Identification", 1, 1),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    (
        "PATHWAY",
        "Pathway",
        1,
        -1,
        (
            ("PTH", "Pathway", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("VAR", "Variance", 0, -1),
            (
                "PATHWAY_ROLE",
                "Pathway Role",
                0,
                -1,
                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "GOAL_ROLE",
                        "Goal Role",
                        0,
                        -1,
                        (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                    ),
                    (
                        "GOAL_OBSERVATION",
                        "Goal Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PROBLEM",
                        "Problem",
                        0,
                        -1,
                        (
                            ("PRB", "Problem Details", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "PROBLEM_ROLE",
                                "Problem Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "PROBLEM_OBSERVATION",
                                "Problem Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    (
                                        "CHOICE",
                                        "Choice",
                                        1,
                                        1,
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                        ),
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                        ),
                                    ),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "ORDER_OBSERVATION",
                                        "Order Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_PPP_PCB = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("PID", "Patient Identification", 1, 1),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    (
        "PATHWAY",
        "Pathway",
        1,
        -1,
        (
            ("PTH", "Pathway", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("VAR", "Variance", 0, -1),
            (
                "PATHWAY_ROLE",
                "Pathway Role",
                0,
                -1,
                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "PROBLEM_ROLE",
                        "Problem Role",
                        0,
                        -1,
                        (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                    ),
                    (
                        "PROBLEM_OBSERVATION",
                        "Problem Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GOAL",
                        "Goal",
                        0,
                        -1,
                        (
                            ("GOL", "Goal Detail", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "GOAL_ROLE",
                                "Goal Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "GOAL_OBSERVATION",
                                "Goal Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    (
                                        "CHOICE",
                                        "Choice",
                                        1,
                                        1,
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                        ),
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                        ),
                                    ),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "ORDER_OBSERVATION",
                                        "Order Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_PPR_PC1 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("PID", "Patient Identification", 1, 1),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    (
        "PROBLEM",
        "Problem",
        1,
        -1,
        (
            ("PRB", "Problem Details", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("VAR", "Variance", 0, -1),
            (
                "PROBLEM_ROLE",
                "Problem Role",
                0,
                -1,
                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (("PTH", "Pathway", 1, 1), ("VAR", "Variance", 0, -1)),
            ),
            (
                "PROBLEM_OBSERVATION",
                "Problem Observation",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "GOAL_ROLE",
                        "Goal Role",
                        0,
                        -1,
                        (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                    ),
                    (
                        "GOAL_OBSERVATION",
                        "Goal Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            (
                                "CHOICE",
                                "Choice",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "ORDER_OBSERVATION",
                                "Order Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

_RDE_O11 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("NTE", "Notes and Comments", 0, -1),
    (
        "PATIENT",
        "Patient",
        0,
        1,
        (
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PRT", "Participation Information", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT_VISIT",
                "Patient Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            ("GT1", "Guarantor", 0, 1),
            ("AL1", "Patient Allergy Information", 0, -1),
        ),
    ),
    (
        "ORDER",
        "Order",
        1,
        -1,
        (
            ("ORC", "Common Order", 1, 1),
            (
                "TIMING",
                "Timing",
                0,
                -1,
                (
                    ("TQ1", "Timing/Quantity", 1, 1),
                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                ),
            ),
            (
                "ORDER_DETAIL",
                "Order Detail",
                0,
                1,
                (
                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                    (
                        "COMPONENT",
                        "Component",
                        0,
                        -1,
                        (
                            ("RXC", "Pharmacy/Treatment Component Order", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            ("PRT", "Participation Information", 0, -1),
            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
            ("PRT", "Participation Information", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "TIMING_ENCODED",
                "Timing Encoded",
                1,
                -1,
                (
                    ("TQ1", "Timing/Quantity", 1, 1),
                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                ),
            ),
            ("RXR", "Pharmacy/Treatment Route", 1, -1),
            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
            (
                "OBSERVATION",
                "Observation",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            ("FT1", "Financial Transaction", 0, -1),
            ("BLG", "Billing", 0, 1),
            ("CTI", "Clinical Trial Identification", 0, -1),
        ),
    ),
)

_REF_I12 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("RF1", "Referral Information", 0, 1),
    (
        "AUTHORIZATION_CONTACT",
        "Authorization Contact",
        0,
        1,
        (("AUT", "Authorization Information", 1, 1), ("CTD", "Contact Data", 0, 1)),
    ),
    (
        "PROVIDER_CONTACT",
        "Provider Contact",
        1,
        -1,
        (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
    ),
    ("PID", "Patient Identification", 1, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("GT1", "Guarantor", 0, -1),
    (
        "INSURANCE",
        "Insurance",
        0,
        -1,
        (
            ("IN1", "Insurance", 1, 1),
            ("IN2", "Insurance Additional Information", 0, 1),
            ("IN3", "Insurance Additional Information, Certification", 0, 1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (
            ("PR1", "Procedures", 1, 1),
            (
                "AUTHORIZATION_CONTACT",
                "Authorization Contact",
                0,
                1,
                (
                    ("AUT", "Authorization Information", 1, 1),
                    ("CTD", "Contact Data", 0, 1),
                ),
            ),
        ),
    ),
    (
        "OBSERVATION",
        "Observation",
        0,
        -1,
        (
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESULTS_NOTES",
                "Results Notes",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    ("NTE", "Notes and Comments", 0, -1),
)

_RPA_I08 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("MSA", "Message Acknowledgment", 1, 1),
    ("RF1", "Referral Information", 0, 1),
    (
        "AUTHORIZATION",
        "Authorization",
        0,
        1,
        (("AUT", "Authorization Information", 1, 1), ("CTD", "Contact Data", 0, 1)),
    ),
    (
        "PROVIDER",
        "Provider",
        1,
        -1,
        (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
    ),
    ("PID", "Patient Identification", 1, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("GT1", "Guarantor", 0, -1),
    (
        "INSURANCE",
        "Insurance",
        0,
        -1,
        (
            ("IN1", "Insurance", 1, 1),
            ("IN2", "Insurance Additional Information", 0, 1),
            ("IN3", "Insurance Additional Information, Certification", 0, 1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    (
        "PROCEDURE",
        "Procedure",
        1,
        -1,
        (
            ("PR1", "Procedures", 1, 1),
            (
                "AUTHORIZATION",
                "Authorization",
                0,
                1,
                (
                    ("AUT", "Authorization Information", 1, 1),
                    ("CTD", "Contact Data", 0, 1),
                ),
            ),
        ),
    ),
    (
        "OBSERVATION",
        "Observation",
        0,
        -1,
        (
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESULTS",
                "Results",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    (
        "VISIT",
        "Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    ("NTE", "Notes and Comments", 0, -1),
)

_RQA_I08 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("RF1", "Referral Information", 0, 1),
    (
        "AUTHORIZATION",
        "Authorization",
        0,
        1,
        (("AUT", "Authorization Information", 1, 1), ("CTD", "Contact Data", 0, 1)),
    ),
    (
        "PROVIDER",
        "Provider",
        1,
        -1,
        (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
    ),
    ("PID", "Patient Identification", 1, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    (
        "GUARANTOR_INSURANCE",
        "Guarantor Insurance",
        0,
        1,
        (
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                1,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (
            ("PR1", "Procedures", 1, 1),
            (
                "AUTHORIZATION",
                "Authorization",
                0,
                1,
                (
                    ("AUT", "Authorization Information", 1, 1),
                    ("CTD", "Contact Data", 0, 1),
                ),
            ),
        ),
    ),
    (
        "OBSERVATION",
        "Observation",
        0,
        -1,
        (
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESULTS",
                "Results",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    (
        "VISIT",
        "Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    ("NTE", "Notes and Comments", 0, -1),
)

_RQI_I01 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    (
        "PROVIDER",
        "Provider",
        1,
        -1,
        (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
    ),
    ("PID", "Patient Identification", 1, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    (
        "GUARANTOR_INSURANCE",
        "Guarantor Insurance",
        0,
        1,
        (
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                1,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
        ),
    ),
    ("NTE", "Notes and Comments", 0, -1),
)

_RRE_O12 = (
    ("MSH", "Message Header", 1, 1),
    ("MSA", "Message Acknowledgment", 1, 1),
    ("ERR", "Error", 0, -1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("NTE", "Notes and Comments", 0, -1),
    (
        "RESPONSE",
        "Response",
        0,
        1,
        (
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "TIMING_ENCODED",
                                "Timing Encoded",
                                1,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
        ),
    ),
)

_RRI_I12 = (
    ("MSH", "Message Header", 1, 1),
    ("SFT", "Software Segment", 0, -1),
    ("UAC", "User Authentication Credential Segment", 0, 1),
    ("MSA", "Message Acknowledgment", 0, 1),
    ("RF1", "Referral Information", 0, 1),
    (
        "AUTHORIZATION_CONTACT",
        "Authorization Contact",
        0,
        1,
        (("AUT", "Authorization Information", 1, 1), ("CTD", "Contact Data", 0, 1)),
    ),
    (
        "PROVIDER_CONTACT",
        "Provider Contact",
        1,
        -1,
        (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
    ),
    ("PID", "Patient Identification", 1, 1),
    ("ACC", "Accident", 0, 1),
    ("DG1", "Diagnosis", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, -1),
    ("AL1", "Patient Allergy Information", 0, -1),
    (
        "PROCEDURE",
        "Procedure",
        0,
        -1,
        (
            ("PR1", "Procedures", 1, 1),
            (
                "AUTHORIZATION_CONTACT",
                "Authorization Contact",
                0,
                1,
                (
                    ("AUT", "Authorization Information", 1, 1),
                    ("CTD", "Contact Data", 0, 1),
                ),
            ),
        ),
    ),
    (
        "OBSERVATION",
        "Observation",
        0,
        -1,
        (
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESULTS_NOTES",
                "Results Notes",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    (
        "PATIENT_VISIT",
        "Patient Visit",
        0,
        1,
        (
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
        ),
    ),
    ("NTE", "Notes and Comments", 0, -1),
)

_SRM_S01 = (
    ("MSH", "Message Header", 1, 1),
    ("ARQ", "Appointment Request", 1, 1),
    ("APR", "Appointment Preferences", 0, 1),
    ("NTE", "Notes and Comments", 0, -1),
    (
        "PATIENT",
        "Patient",
        0,
        -1,
        (
            ("PID", "Patient Identification", 1, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("OBX", "Observation/Result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
        ),
    ),
    (
        "RESOURCES",
        "Resources",
        1,
        -1,
        (
            ("RGS", "Resource Group", 1, 1),
            (
                "SERVICE",
                "Service",
                0,
                -1,
                (
                    ("AIS", "Appointment Information", 1, 1),
                    ("APR", "Appointment Preferences", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "GENERAL_RESOURCE",
                "General Resource",
                0,
                -1,
                (
                    ("AIG", "Appointment Information - General Resource", 1, 1),
                    ("APR", "Appointment Preferences", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "LOCATION_RESOURCE",
                "Location Resource",
                0,
                -1,
                (
                    ("AIL", "Appointment Information - Location Resource", 1, 1),
                    ("APR", "Appointment Preferences", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
            (
                "PERSONNEL_RESOURCE",
                "Personnel Resource",
                0,
                -1,
                (
                    ("AIP", "Appointment Information - Personnel Resource", 1, 1),
                    ("APR", "Appointment Preferences", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
)

_SRR_S01 = (
    ("MSH", "Message Header", 1, 1),
    ("MSA", "Message Acknowledgment", 1, 1),
    ("ERR", "Error", 0, -1),
    (
        "SCHEDULE",
        "Schedule",
        0,
        1,
        (
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCE",
                "Resource",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
)

MESSAGES = {
    "ACK": (
        "ACK",
        "General acknowledgment message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
        ),
    ),
    "ADT_A01": ("ADT_A01", "Admit/visit notification", _ADT_A01),
    "ADT_A02": (
        "ADT_A02",
        "Transfer a patient",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("PDA", "Patient Death and Autopsy", 0, 1),
        ),
    ),
    "ADT_A03": (
        "ADT_A03",
        "Discharge/end visit",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("DB1", "Disability", 0, -1),
            ("AL1", "Patient Allergy Information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
            (
                "PROCEDURE",
                "Procedure",
                0,
                -1,
                (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
            ),
            ("OBX", "Observation/Result", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, -1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("PDA", "Patient Death and Autopsy", 0, 1),
        ),
    ),
    "ADT_A04": ("ADT_A01", "Register a patient", _ADT_A01),
    "ADT_A05": ("ADT_A05", "Pre-admit a patient", _ADT_A05),
    "ADT_A06": ("ADT_A06", "Change an outpatient to an inpatient", _ADT_A06),
    "ADT_A07": ("ADT_A06", "Change an inpatient to an outpatient", _ADT_A06),
    "ADT_A08": ("ADT_A01", "Update patient information", _ADT_A01),
    "ADT_A09": ("ADT_A09", "Patient departing - tracking", _ADT_A09),
    "ADT_A10": ("ADT_A09", "Patient arriving - tracking", _ADT_A09),
    "ADT_A11": ("ADT_A09", "Cancel admit/visit notification", _ADT_A09),
    "ADT_A12": (
        "ADT_A12",
        "Cancel transfer",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
        ),
    ),
    "ADT_A13": ("ADT_A01", "Cancel discharge/end visit", _ADT_A01),
    "ADT_A14": ("ADT_A05", "Pending admit", _ADT_A05),
    "ADT_A15": (
        "ADT_A15",
        "Pending transfer",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
        ),
    ),
    "ADT_A16": (
        "ADT_A16",
        "Pending discharge",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("ARV", "Access Restriction", 0, -1),
            ("ROL", "Role", 0, -1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("AL1", "Patient Allergy Information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
            (
                "PROCEDURE",
                "Procedure",
                0,
                -1,
                (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
            ),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, -1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
        ),
    ),
    "ADT_A17": (
        "ADT_A17",
        "Swap patients",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
        ),
    ),
    "ADT_A20": (
        "ADT_A20",
        "Bed status update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("NPU", "Bed Status Update", 1, 1),
        ),
    ),
    "ADT_A21": ("ADT_A21", "Patient goes on a \"leave of absence\"", _ADT_A21),
    "ADT_A22": ("ADT_A21", "Patient returns from a \"leave of absence\"", _ADT_A21),
    "ADT_A23": ("ADT_A21", "Delete a patient record", _ADT_A21),
    "ADT_A24": (
        "ADT_A24",
        "Link patient information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("DB1", "Disability", 0, -1),
        ),
    ),
    "ADT_A25": ("ADT_A21", "Cancel pending discharge", _ADT_A21),
    "ADT_A26": ("ADT_A21", "Cancel pending transfer", _ADT_A21),
    "ADT_A27": ("ADT_A21", "Cancel pending admit", _ADT_A21),
    "ADT_A28": ("ADT_A05", "Add person information", _ADT_A05),
    "ADT_A29": ("ADT_A21", "Delete person information", _ADT_A21),
    "ADT_A31": ("ADT_A05", "Update person information", _ADT_A05),
    "ADT_A32": ("ADT_A21", "Cancel patient arriving - tracking", _ADT_A21),
    "ADT_A33": ("ADT_A21", "Cancel patient departing - tracking", _ADT_A21),
    "ADT_A37": (
        "ADT_A37",
        "Unlink patient information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("DB1", "Disability", 0, -1),
        ),
    ),
    "ADT_A38": (
        "ADT_A38",
        "Cancel pre-admit",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
        ),
    ),
    "ADT_A39": ("ADT_A39", "Merge person - patient ID", _ADT_A39),
    "ADT_A40": ("ADT_A39", "Merge patient - patient identifier list", _ADT_A39),
    "ADT_A41": ("ADT_A39", "Merge account - patient account number", _ADT_A39),
    "ADT_A42": ("ADT_A39", "Merge visit - visit number", _ADT_A39),
    "ADT_A43": (
        "ADT_A43",
        "Move patient information - patient identifier list",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("MRG", "Merge Patient Information", 1, 1),
                ),
            ),
        ),
    ),
    "ADT_A44": (
        "ADT_A44",
        "Move account information - patient account number",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("ARV", "Access Restriction", 0, -1),
                    ("MRG", "Merge Patient Information", 1, 1),
                ),
            ),
        ),
    ),
    "ADT_A45": (
        "ADT_A45",
        "Move visit information - visit number",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            (
                "MERGE_INFO",
                "Merge Info",
                1,
                -1,
                (
                    ("MRG", "Merge Patient Information", 1, 1),
                    ("PV1", "Patient Visit", 1, 1),
                ),
            ),
        ),
    ),
    "ADT_A50": ("ADT_A50", "Change visit number", _ADT_A50),
    "ADT_A51": ("ADT_A50", "Change alternate visit ID", _ADT_A50),
    "ADT_A52": ("ADT_A52", "Cancel leave of absence for a patient", _ADT_A52),
    "ADT_A53": ("ADT_A52", "Cancel patient returns from a leave of absence", _ADT_A52),
    "ADT_A54": (
        "ADT_A54",
        "Change attending doctor",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ROL", "Role", 0, -1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("ROL", "Role", 0, -1),
        ),
    ),
    "ADT_A55": ("ADT_A52", "Cancel change attending doctor", _ADT_A52),
    "ADT_A60": (
        "ADT_A60",
        "Update allergy information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("ARV", "Access Restriction", 0, -1),
            (
                "VISIT",
                "Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("ARV", "Access Restriction", 0, -1),
                ),
            ),
            (
                "ADVERSE_REACTION_GROUP",
                "Adverse Reaction Group",
                0,
                -1,
                (
                    ("IAM", "Patient Adverse Reaction Information", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("IAR", "Allergy Reaction", 0, -1),
                ),
            ),
        ),
    ),
    "ADT_A61": ("ADT_A61", "Change consulting doctor", _ADT_A61),
    "ADT_A62": ("ADT_A61", "Cancel change consulting doctor", _ADT_A61),
    "BAR_P01": (
        "BAR_P01",
        "Add patient accounts",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ROL", "Role", 0, -1),
            (
                "VISIT",
                "Visit",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("ROL", "Role", 0, -1),
                    ("DB1", "Disability", 0, -1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                    ("DRG", "Diagnosis Related Group", 0, 1),
                    (
                        "PROCEDURE",
                        "Procedure",
                        0,
                        -1,
                        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
                    ),
                    ("GT1", "Guarantor", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                -1,
                            ),
                            ("ROL", "Role", 0, -1),
                        ),
                    ),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82", 0, 1),
                    ("UB2", "UB92 Data", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P02": (
        "BAR_P02",
        "Purge patient accounts",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("DB1", "Disability", 0, -1),
                ),
            ),
        ),
    ),
    "BAR_P05": (
        "BAR_P05",
        "Update account",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ROL", "Role", 0, -1),
            (
                "VISIT",
                "Visit",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("ROL", "Role", 0, -1),
                    ("DB1", "Disability", 0, -1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                    ("DRG", "Diagnosis Related Group", 0, 1),
                    (
                        "PROCEDURE",
                        "Procedure",
                        0,
                        -1,
                        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
                    ),
                    ("GT1", "Guarantor", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                -1,
                            ),
                            ("ROL", "Role", 0, -1),
                        ),
                    ),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82", 0, 1),
                    ("UB2", "UB92 Data", 0, 1),
                    ("ABS", "Abstract", 0, 1),
                    ("BLC", "Blood Code", 0, -1),
                    ("RMI", "Risk Management Incident", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P06": (
        "BAR_P06",
        "End account",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PV1", "Patient Visit", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P10": (
        "BAR_P10",
        "Transmit ambulatory payment classification (APC)",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("DG1", "Diagnosis", 0, -1),
            ("GP1", "Grouping/Reimbursement - Visit", 1, 1),
            (
                "PROCEDURE",
                "Procedure",
                0,
                -1,
                (
                    ("PR1", "Procedures", 1, 1),
                    ("GP2", "Grouping/Reimbursement - Procedure Line Item", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P12": (
        "BAR_P12",
        "Update diagnosis/procedure",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
            (
                "PROCEDURE",
                "Procedure",
                0,
                -1,
                (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
            ),
            ("OBX", "Observation/Result", 0, 1),
        ),
    ),
    "BPS_O29": (
        "BPS_O29",
        "Blood product dispense status",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("BPO", "Blood Product Order", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PRODUCT",
                        "Product",
                        0,
                        -1,
                        (
                            ("BPX", "Blood Product Dispense Status", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "BRP_O30": (
        "BRP_O30",
        "Blood product dispense status acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("BPO", "Blood Product Order", 0, 1),
                                    ("BPX", "Blood Product Dispense Status", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "BRT_O32": (
        "BRT_O32",
        "Blood product transfusion/disposition acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    ("PID", "Patient Identification", 0, 1),
                    (
                        "ORDER",
                        "Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("BPO", "Blood Product Order", 0, 1),
                            ("BTX", "Blood Product Transfusion/Disposition", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "BTS_O31": (
        "BTS_O31",
        "Blood product transfusion/disposition",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("BPO", "Blood Product Order", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PRODUCT_STATUS",
                        "Product Status",
                        0,
                        -1,
                        (
                            ("BTX", "Blood Product Transfusion/Disposition", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "CCF_I22": (
        "CCF_I22",
        "Collaborative care fetch/collaborative care information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("PID", "Patient Identification", 1, 1),
        ),
    ),
    "CCI_I22": (
        "CCI_I22",
        "Collaborative care fetch/collaborative care information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "APPOINTMENT_HISTORY",
                "Appointment History",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    (
                        "RESOURCES",
                        "Resources",
                        0,
                        -1,
                        (
                            ("RGS", "Resource Group", 1, 1),
                            (
                                "RESOURCE_DETAIL",
                                "Resource Detail",
                                0,
                                -1,
                                (
                                    (
                                        "RESOURCE_OBJECT",
                                        "Resource Object",
                                        1,
                                        1,
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "CLINICAL_HISTORY",
                "Clinical History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_HISTORY_DETAIL",
                        "Clinical History Detail",
                        0,
                        -1,
                        (
                            (
                                "CLINICAL_HISTORY_OBJECT",
                                "Clinical History Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "ROLE_CLINICAL_HISTORY",
                        "Role Clinical History",
                        0,
                        -1,
                        (
                            (
                                "ROLE_CLINICAL_HISTORY_OBJECT",
                                "Role Clinical History Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT_VISITS",
                "Patient Visits",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            (
                "MEDICATION_HISTORY",
                "Medication History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "MEDICATION_ORDER_DETAIL",
                        "Medication Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ENCODING_DETAIL",
                        "Medication Encoding Detail",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ADMINISTRATION_DETAIL",
                        "Medication Administration Detail",
                        0,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PROBLEM",
                        "Role Problem",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PROBLEM_OBJECT",
                                "Role Problem Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_GOAL",
                        "Role Goal",
                        0,
                        -1,
                        (
                            (
                                "ROLE_GOAL_OBJECT",
                                "Role Goal Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (
                    ("PTH", "Pathway", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PATHWAY",
                        "Role Pathway",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PATHWAY_OBJECT",
                                "Role Pathway Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CCM_I21": (
        "CCM_I21",
        "Collaborative care message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "APPOINTMENT_HISTORY",
                "Appointment History",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    (
                        "RESOURCES",
                        "Resources",
                        0,
                        -1,
                        (
                            ("RGS", "Resource Group", 1, 1),
                            (
                                "RESOURCE_DETAIL",
                                "Resource Detail",
                                0,
                                -1,
                                (
                                    (
                                        "RESOURCE_OBJECT",
                                        "Resource Object",
                                        1,
                                        1,
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "CLINICAL_HISTORY",
                "Clinical History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_HISTORY_DETAIL",
                        "Clinical History Detail",
                        0,
                        -1,
                        (
                            (
                                "CLINICAL_HISTORY_OBJECT",
                                "Clinical History Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "ROLE_CLINICAL_HISTORY",
                        "Role Clinical History",
                        0,
                        -1,
                        (
                            (
                                "ROLE_CLINICAL_HISTORY_OBJECT",
                                "Role Clinical History Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT_VISITS",
                "Patient Visits",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            (
                "MEDICATION_HISTORY",
                "Medication History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "MEDICATION_ORDER_DETAIL",
                        "Medication Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ENCODING_DETAIL",
                        "Medication Encoding Detail",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ADMINISTRATION_DETAIL",
                        "Medication Administration Detail",
                        0,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PROBLEM",
                        "Role Problem",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PROBLEM_OBJECT",
                                "Role Problem Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_GOAL",
                        "Role Goal",
                        0,
                        -1,
                        (
                            (
                                "ROLE_GOAL_OBJECT",
                                "Role Goal Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (
                    ("PTH", "Pathway", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PATHWAY",
                        "Role Pathway",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PATHWAY_OBJECT",
                                "Role Pathway Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CCQ_I19": (
        "CCQ_I19",
        "Collaborative care query/collaborative care query update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("RF1", "Referral Information", 1, 1),
            (
                "PROVIDER_CONTACT",
                "Provider Contact",
                0,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CCR_I16": (
        "CCR_I16",
        "Collaborative care referral",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("RF1", "Referral Information", 1, -1),
            (
                "PROVIDER_CONTACT",
                "Provider Contact",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            (
                "CLINICAL_ORDER",
                "Clinical Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_ORDER_TIMING",
                        "Clinical Order Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "CLINICAL_ORDER_DETAIL",
                        "Clinical Order Detail",
                        1,
                        -1,
                        (
                            (
                                "CLINICAL_ORDER_OBJECT",
                                "Clinical Order Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "APPOINTMENT_HISTORY",
                "Appointment History",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    (
                        "RESOURCES",
                        "Resources",
                        0,
                        -1,
                        (
                            ("RGS", "Resource Group", 1, 1),
                            (
                                "RESOURCE_DETAIL",
                                "Resource Detail",
                                0,
                                -1,
                                (
                                    (
                                        "RESOURCE_OBJECT",
                                        "Resource Object",
                                        1,
                                        1,
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "CLINICAL_HISTORY",
                "Clinical History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_HISTORY_DETAIL",
                        "Clinical History Detail",
                        0,
                        -1,
                        (
                            (
                                "CLINICAL_HISTORY_OBJECT",
                                "Clinical History Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "ROLE_CLINICAL_HISTORY",
                        "Role Clinical History",
                        0,
                        -1,
                        (
                            (
                                "ROLE_CLINICAL_HISTORY_OBJECT",
                                "Role Clinical History Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT_VISITS",
                "Patient Visits",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            (
                "MEDICATION_HISTORY",
                "Medication History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "MEDICATION_ORDER_DETAIL",
                        "Medication Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ENCODING_DETAIL",
                        "Medication Encoding Detail",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ADMINISTRATION_DETAIL",
                        "Medication Administration Detail",
                        0,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PROBLEM",
                        "Role Problem",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PROBLEM_OBJECT",
                                "Role Problem Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_GOAL",
                        "Role Goal",
                        0,
                        -1,
                        (
                            (
                                "ROLE_GOAL_OBJECT",
                                "Role Goal Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (
                    ("PTH", "Pathway", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PATHWAY",
                        "Role Pathway",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PATHWAY_OBJECT",
                                "Role Pathway Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CCU_I20": (
        "CCU_I20",
        "Asynchronous collaborative care update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("RF1", "Referral Information", 1, 1),
            (
                "PROVIDER_CONTACT",
                "Provider Contact",
                0,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "APPOINTMENT_HISTORY",
                "Appointment History",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    (
                        "RESOURCES",
                        "Resources",
                        0,
                        -1,
                        (
                            ("RGS", "Resource Group", 1, 1),
                            (
                                "RESOURCE_DETAIL",
                                "Resource Detail",
                                0,
                                -1,
                                (
                                    (
                                        "RESOURCE_OBJECT",
                                        "Resource Object",
                                        1,
                                        1,
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "CLINICAL_HISTORY",
                "Clinical History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_HISTORY_DETAIL",
                        "Clinical History Detail",
                        0,
                        -1,
                        (
                            (
                                "CLINICAL_HISTORY_OBJECT",
                                "Clinical History Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "ROLE_CLINICAL_HISTORY",
                        "Role Clinical History",
                        0,
                        -1,
                        (
                            (
                                "ROLE_CLINICAL_HISTORY_OBJECT",
                                "Role Clinical History Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT_VISITS",
                "Patient Visits",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            (
                "MEDICATION_HISTORY",
                "Medication History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "MEDICATION_ORDER_DETAIL",
                        "Medication Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ENCODING_DETAIL",
                        "Medication Encoding Detail",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ADMINISTRATION_DETAIL",
                        "Medication Administration Detail",
                        0,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PROBLEM",
                        "Role Problem",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PROBLEM_OBJECT",
                                "Role Problem Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_GOAL",
                        "Role Goal",
                        0,
                        -1,
                        (
                            (
                                "ROLE_GOAL_OBJECT",
                                "Role Goal Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (
                    ("PTH", "Pathway", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PATHWAY",
                        "Role Pathway",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PATHWAY_OBJECT",
                                "Role Pathway Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CQU_I19": (
        "CQU_I19",
        "Collaborative care query/collaborative care query update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("RF1", "Referral Information", 1, 1),
            (
                "PROVIDER_CONTACT",
                "Provider Contact",
                0,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "APPOINTMENT_HISTORY",
                "Appointment History",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    (
                        "RESOURCES",
                        "Resources",
                        0,
                        -1,
                        (
                            ("RGS", "Resource Group", 1, 1),
                            (
                                "RESOURCE_DETAIL",
                                "Resource Detail",
                                0,
                                -1,
                                (
                                    (
                                        "RESOURCE_OBJECT",
                                        "Resource Object",
                                        1,
                                        1,
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                        (
                                            ("AIS", "Appointment Information", 1, 1),
                                            (
                                                "AIG",
                                                "Appointment Information - General Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIL",
                                                "Appointment Information - Location Resource",
                                                1,
                                                1,
                                            ),
                                            (
                                                "AIP",
                                                "Appointment Information - Personnel Resource",
                                                1,
                                                1,
                                            ),
                                        ),
                                    ),
                                    ("OBX", "Observation/Result", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "CLINICAL_HISTORY",
                "Clinical History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "CLINICAL_HISTORY_DETAIL",
                        "Clinical History Detail",
                        0,
                        -1,
                        (
                            (
                                "CLINICAL_HISTORY_OBJECT",
                                "Clinical History Object",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("PR1", "Procedures", 1, 1),
                                    ("RF1", "Referral Information", 1, 1),
                                    ("AL1", "Patient Allergy Information", 1, 1),
                                    (
                                        "IAM",
                                        "Patient Adverse Reaction Information",
                                        1,
                                        1,
                                    ),
                                    ("ACC", "Accident", 1, 1),
                                    ("RMI", "Risk Management Incident", 1, 1),
                                    ("DB1", "Disability", 1, 1),
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("DRG", "Diagnosis Related Group", 1, 1),
                                    ("PDA", "Patient Death and Autopsy", 1, 1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "ROLE_CLINICAL_HISTORY",
                        "Role Clinical History",
                        0,
                        -1,
                        (
                            (
                                "ROLE_CLINICAL_HISTORY_OBJECT",
                                "Role Clinical History Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PATIENT_VISITS",
                "Patient Visits",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            (
                "MEDICATION_HISTORY",
                "Medication History",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "MEDICATION_ORDER_DETAIL",
                        "Medication Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ENCODING_DETAIL",
                        "Medication Encoding Detail",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "MEDICATION_ADMINISTRATION_DETAIL",
                        "Medication Administration Detail",
                        0,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            (
                "PROBLEM",
                "Problem",
                0,
                -1,
                (
                    ("PRB", "Problem Details", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PROBLEM",
                        "Role Problem",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PROBLEM_OBJECT",
                                "Role Problem Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "GOAL",
                "Goal",
                0,
                -1,
                (
                    ("GOL", "Goal Detail", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_GOAL",
                        "Role Goal",
                        0,
                        -1,
                        (
                            (
                                "ROLE_GOAL_OBJECT",
                                "Role Goal Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            (
                "PATHWAY",
                "Pathway",
                0,
                -1,
                (
                    ("PTH", "Pathway", 1, 1),
                    ("VAR", "Variance", 0, -1),
                    (
                        "ROLE_PATHWAY",
                        "Role Pathway",
                        0,
                        -1,
                        (
                            (
                                "ROLE_PATHWAY_OBJECT",
                                "Role Pathway Object",
                                1,
                                1,
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                                (("ROL", "Role", 1, 1), ("PRD", "Provider Data", 1, 1)),
                            ),
                            ("VAR", "Variance", 0, -1),
                        ),
                    ),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("REL", "Clinical Relationship Segment", 0, -1),
        ),
    ),
    "CRM_C01": ("CRM_C01", "Register a patient on a clinical trial", _CRM_C01),
    "CRM_C02": (
        "CRM_C01",
        "Cancel a patient registration on clinical trial (for clerical mistakes only)",
        _CRM_C01,
    ),
    "CRM_C03": ("CRM_C01", "Correct/update registration information", _CRM_C01),
    "CRM_C04": ("CRM_C01", "Patient has gone off a clinical trial", _CRM_C01),
    "CRM_C05": ("CRM_C01", "Patient enters phase of clinical trial", _CRM_C01),
    "CRM_C06": (
        "CRM_C01",
        "Cancel patient entering a phase (clerical mistake)",
        _CRM_C01,
    ),
    "CRM_C07": ("CRM_C01", "Correct/update phase information", _CRM_C01),
    "CRM_C08": ("CRM_C01", "Patient has gone off phase of clinical trial", _CRM_C01),
    "CSU_C09": (
        "CSU_C09",
        "Automated time intervals for reporting, like monthly",
        _CSU_C09,
    ),
    "CSU_C10": ("CSU_C09", "Patient completes the clinical trial", _CSU_C09),
    "CSU_C11": ("CSU_C09", "Patient completes a phase of the clinical trial", _CSU_C09),
    "CSU_C12": (
        "CSU_C09",
        "Update/correction of patient order/result information",
        _CSU_C09,
    ),
    "DFT_P03": (
        "DFT_P03",
        "Post detail financial transaction",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ROL", "Role", 0, -1),
            (
                "VISIT",
                "Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("DB1", "Disability", 0, -1),
            (
                "COMMON_ORDER",
                "Common Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 0, 1),
                    (
                        "TIMING_QUANTITY",
                        "Timing Quantity",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        0,
                        1,
                        (
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "FINANCIAL",
                "Financial",
                1,
                -1,
                (
                    ("FT1", "Financial Transaction", 1, 1),
                    ("NTE", "Notes and Comments", 0, 1),
                    (
                        "FINANCIAL_PROCEDURE",
                        "Financial Procedure",
                        0,
                        -1,
                        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
                    ),
                    (
                        "FINANCIAL_COMMON_ORDER",
                        "Financial Common Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 0, 1),
                            (
                                "FINANCIAL_TIMING_QUANTITY",
                                "Financial Timing Quantity",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "FINANCIAL_ORDER",
                                "Financial Order",
                                0,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "FINANCIAL_OBSERVATION",
                                "Financial Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, -1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
        ),
    ),
    "DFT_P11": (
        "DFT_P11",
        "Post detail financial transactions - new",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("ROL", "Role", 0, -1),
            (
                "VISIT",
                "Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("DB1", "Disability", 0, -1),
            (
                "COMMON_ORDER",
                "Common Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 0, 1),
                    (
                        "TIMING_QUANTITY",
                        "Timing Quantity",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        0,
                        1,
                        (
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, 1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, -1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            (
                "FINANCIAL",
                "Financial",
                1,
                -1,
                (
                    ("FT1", "Financial Transaction", 1, 1),
                    (
                        "FINANCIAL_PROCEDURE",
                        "Financial Procedure",
                        0,
                        -1,
                        (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
                    ),
                    (
                        "FINANCIAL_COMMON_ORDER",
                        "Financial Common Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 0, 1),
                            (
                                "FINANCIAL_TIMING_QUANTITY",
                                "Financial Timing Quantity",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "FINANCIAL_ORDER",
                                "Financial Order",
                                0,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "FINANCIAL_OBSERVATION",
                                "Financial Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    ("DG1", "Diagnosis", 0, -1),
                    ("DRG", "Diagnosis Related Group", 0, 1),
                    ("GT1", "Guarantor", 0, -1),
                    (
                        "FINANCIAL_INSURANCE",
                        "Financial Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                -1,
                            ),
                            ("ROL", "Role", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "EAC_U07": (
        "EAC_U07",
        "Automated equipment command",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "COMMAND",
                "Command",
                1,
                -1,
                (
                    ("ECD", "Equipment Command", 1, 1),
                    ("TQ1", "Timing/Quantity", 0, 1),
                    (
                        "SPECIMEN_CONTAINER",
                        "Specimen Container",
                        0,
                        1,
                        (
                            ("SAC", "Specimen Container Detail", 1, 1),
                            ("SPM", "Specimen", 0, -1),
                        ),
                    ),
                    ("CNS", "Clear Notification", 0, 1),
                ),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "EAN_U09": (
        "EAN_U09",
        "Automated equipment notification",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "NOTIFICATION",
                "Notification",
                1,
                -1,
                (
                    ("NDS", "Notification Detail", 1, 1),
                    ("NTE", "Notes and Comments", 0, 1),
                ),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "EAR_U08": (
        "EAR_U08",
        "Automated equipment response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "COMMAND_RESPONSE",
                "Command Response",
                1,
                -1,
                (
                    ("ECD", "Equipment Command", 1, 1),
                    (
                        "SPECIMEN_CONTAINER",
                        "Specimen Container",
                        0,
                        1,
                        (
                            ("SAC", "Specimen Container Detail", 1, 1),
                            ("SPM", "Specimen", 0, -1),
                        ),
                    ),
                    ("ECR", "Equipment Command Response", 1, 1),
                ),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "EHC_E01": (
        "EHC_E01",
        "Submit health care services invoice",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "INVOICE_INFORMATION",
                "Invoice Information",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PYE", "Payee Information", 0, 1),
                    ("CTD", "Contact Data", 0, -1),
                    ("AUT", "Authorization Information", 0, 1),
                    ("LOC", "Location Identification", 0, -1),
                    ("ROL", "Role", 0, -1),
                    (
                        "PRODUCT_SERVICE_SECTION",
                        "Product Service Section",
                        1,
                        -1,
                        (
                            ("PSS", "Product/Service Section", 1, 1),
                            (
                                "PRODUCT_SERVICE_GROUP",
                                "Product Service Group",
                                1,
                                -1,
                                (
                                    ("PSG", "Product/Service Group", 1, 1),
                                    ("LOC", "Location Identification", 0, -1),
                                    ("ROL", "Role", 0, -1),
                                    (
                                        "PATIENT_INFO",
                                        "Patient Info",
                                        0,
                                        -1,
                                        (
                                            ("PID", "Patient Identification", 1, 1),
                                            ("PV1", "Patient Visit", 0, 1),
                                            (
                                                "PV2",
                                                "Patient Visit - Additional Information",
                                                0,
                                                1,
                                            ),
                                            ("ACC", "Accident", 0, -1),
                                            (
                                                "INSURANCE",
                                                "Insurance",
                                                1,
                                                -1,
                                                (
                                                    ("IN1", "Insurance", 1, 1),
                                                    (
                                                        "IN2",
                                                        "Insurance Additional Information",
                                                        0,
                                                        1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "DIAGNOSIS",
                                                "Diagnosis",
                                                0,
                                                -1,
                                                (
                                                    ("DG1", "Diagnosis", 1, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            ("OBX", "Observation/Result", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PRODUCT_SERVICE_LINE_ITEM",
                                        "Product Service Line Item",
                                        1,
                                        -1,
                                        (
                                            ("PSL", "Product/Service Line Item", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("ADJ", "Adjustment", 0, -1),
                                            ("AUT", "Authorization Information", 0, 1),
                                            ("LOC", "Location Identification", 0, -1),
                                            ("ROL", "Role", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PROCEDURE",
                                        "Procedure",
                                        0,
                                        -1,
                                        (
                                            ("PR1", "Procedures", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("ROL", "Role", 0, -1),
                                        ),
                                    ),
                                    (
                                        "INVOICE_PROCESSING",
                                        "Invoice Processing",
                                        0,
                                        -1,
                                        (("IPR", "Invoice Processing Results", 1, 1),),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PYE", "Payee Information", 0, 1),
                    ("CTD", "Contact Data", 0, -1),
                    ("AUT", "Authorization Information", 0, 1),
                    ("LOC", "Location Identification", 0, -1),
                    ("ROL", "Role", 0, -1),
                    ("PRODUCT_SERVICE_SECTION", "Product Service Section", 1, -1),
                ),
            ),
        ),
    ),
    "EHC_E02": (
        "EHC_E02",
        "Cancel health care services invoice",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "INVOICE_INFORMATION",
                "Invoice Information",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PYE", "Payee Information", 1, 1),
                    ("CTD", "Contact Data", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PRODUCT_SERVICE_SECTION",
                        "Product Service Section",
                        0,
                        -1,
                        (
                            ("PSS", "Product/Service Section", 1, 1),
                            (
                                "PSG",
                                "Psg",
                                0,
                                -1,
                                (
                                    ("PSG", "Product/Service Group", 1, 1),
                                    ("PSL", "Product/Service Line Item", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PYE", "Payee Information", 1, 1),
                    ("CTD", "Contact Data", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRODUCT_SERVICE_SECTION", "Product Service Section", 0, -1),
                ),
            ),
        ),
    ),
    "EHC_E04": (
        "EHC_E04",
        "Re-assess health care services invoice request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "REASSESSMENT_REQUEST_INFO",
                "Reassessment Request Info",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PRODUCT_SERVICE_SECTION",
                        "Product Service Section",
                        0,
                        -1,
                        (
                            ("PSS", "Product/Service Section", 1, 1),
                            (
                                "PRODUCT_SERVICE_GROUP",
                                "Product Service Group",
                                0,
                                -1,
                                (
                                    ("PSG", "Product/Service Group", 1, 1),
                                    ("PSL", "Product/Service Line Item", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRODUCT_SERVICE_SECTION", "Product Service Section", 0, -1),
                ),
            ),
        ),
    ),
    "EHC_E10": (
        "EHC_E10",
        "Edit/adjudication results",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            (
                "INVOICE_PROCESSING_RESULTS_INFO",
                "Invoice Processing Results Info",
                1,
                -1,
                (
                    ("IPR", "Invoice Processing Results", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PYE", "Payee Information", 1, 1),
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IVC", "Invoice Segment", 1, 1),
                    (
                        "PRODUCT_SERVICE_SECTION",
                        "Product Service Section",
                        1,
                        -1,
                        (
                            ("PSS", "Product/Service Section", 1, 1),
                            (
                                "PRODUCT_SERVICE_GROUP",
                                "Product Service Group",
                                1,
                                -1,
                                (
                                    ("PSG", "Product/Service Group", 1, 1),
                                    (
                                        "PRODUCT_SERVICE_LINE_INFO",
                                        "Product Service Line Info",
                                        1,
                                        -1,
                                        (
                                            ("PSL", "Product/Service Line Item", 1, 1),
                                            ("ADJ", "Adjustment", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "EHC_E12": (
        "EHC_E12",
        "Request additional information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("RFI", "Request for Information", 1, 1),
            ("CTD", "Contact Data", 0, -1),
            ("IVC", "Invoice Segment", 1, 1),
            ("PSS", "Product/Service Section", 1, 1),
            ("PSG", "Product/Service Group", 1, 1),
            ("PID", "Patient Identification", 0, 1),
            ("PSL", "Product/Service Line Item", 0, -1),
            (
                "REQUEST",
                "Request",
                1,
                -1,
                (
                    ("CTD", "Contact Data", 0, 1),
                    ("OBR", "Observation Request", 1, 1),
                    ("NTE", "Notes and Comments", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
        ),
    ),
    "EHC_E13": (
        "EHC_E13",
        "Additional information response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("RFI", "Request for Information", 1, 1),
            ("CTD", "Contact Data", 0, -1),
            ("IVC", "Invoice Segment", 1, 1),
            ("PSS", "Product/Service Section", 1, 1),
            ("PSG", "Product/Service Group", 1, 1),
            ("PID", "Patient Identification", 0, 1),
            ("PSL", "Product/Service Line Item", 0, 1),
            (
                "REQUEST",
                "Request",
                1,
                -1,
                (
                    ("CTD", "Contact Data", 0, 1),
                    ("OBR", "Observation Request", 1, 1),
                    ("NTE", "Notes and Comments", 0, 1),
                    (
                        "RESPONSE",
                        "Response",
                        1,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, 1),
                            ("TXA", "Transcription Document Header", 0, 1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "EHC_E15": (
        "EHC_E15",
        "Payment/remittance advice",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "PAYMENT_REMITTANCE_HEADER_INFO",
                "Payment Remittance Header Info",
                1,
                1,
                (
                    ("PMT", "Payment Information", 1, 1),
                    ("PYE", "Payee Information", 1, 1),
                ),
                (
                    ("PMT", "Payment Information", 1, 1),
                    ("PYE", "Payee Information", 1, 1),
                ),
            ),
            (
                "PAYMENT_REMITTANCE_DETAIL_INFO",
                "Payment Remittance Detail Info",
                0,
                -1,
                (
                    ("IPR", "Invoice Processing Results", 1, 1),
                    ("IVC", "Invoice Segment", 1, 1),
                    (
                        "PRODUCT_SERVICE_SECTION",
                        "Product Service Section",
                        1,
                        -1,
                        (
                            ("PSS", "Product/Service Section", 1, 1),
                            (
                                "PRODUCT_SERVICE_GROUP",
                                "Product Service Group",
                                1,
                                -1,
                                (
                                    ("PSG", "Product/Service Group", 1, 1),
                                    (
                                        "PSL_ITEM_INFO",
                                        "Psl Item Info",
                                        1,
                                        -1,
                                        (
                                            ("PSL", "Product/Service Line Item", 1, 1),
                                            ("ADJ", "Adjustment", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "ADJUSTMENT_PAYEE",
                "Adjustment Payee",
                0,
                -1,
                (("ADJ", "Adjustment", 1, 1), ("ROL", "Role", 0, 1)),
            ),
        ),
    ),
    "EHC_E20": (
        "EHC_E20",
        "Submit authorization request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "AUTHORIZATION_REQUEST",
                "Authorization Request",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("CTD", "Contact Data", 1, -1),
                    ("LOC", "Location Identification", 0, -1),
                    ("ROL", "Role", 0, -1),
                    (
                        "PAT_INFO",
                        "Pat Info",
                        1,
                        -1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("ACC", "Accident", 0, -1),
                            (
                                "INSURANCE",
                                "Insurance",
                                1,
                                -1,
                                (
                                    ("IN1", "Insurance", 1, 1),
                                    ("IN2", "Insurance Additional Information", 0, 1),
                                ),
                            ),
                            (
                                "DIAGNOSIS",
                                "Diagnosis",
                                0,
                                -1,
                                (
                                    ("DG1", "Diagnosis", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                    (
                        "PSL_ITEM_INFO",
                        "Psl Item Info",
                        1,
                        -1,
                        (
                            ("PSL", "Product/Service Line Item", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("ADJ", "Adjustment", 0, -1),
                            ("LOC", "Location Identification", 0, -1),
                            ("ROL", "Role", 0, -1),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("CTD", "Contact Data", 1, -1),
                    ("LOC", "Location Identification", 0, -1),
                    ("ROL", "Role", 0, -1),
                    ("PAT_INFO", "Pat Info", 1, -1),
                    ("PSL_ITEM_INFO", "Psl Item Info", 1, -1),
                ),
            ),
        ),
    ),
    "EHC_E21": (
        "EHC_E21",
        "Cancel authorization request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "AUTHORIZATION_REQUEST",
                "Authorization Request",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    (
                        "PSL_ITEM_INFO",
                        "Psl Item Info",
                        1,
                        -1,
                        (
                            ("PSL", "Product/Service Line Item", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("AUT", "Authorization Information", 0, 1),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PSL_ITEM_INFO", "Psl Item Info", 1, -1),
                ),
            ),
        ),
    ),
    "EHC_E24": (
        "EHC_E24",
        "Authorization response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            (
                "AUTHORIZATION_RESPONSE_INFO",
                "Authorization Response Info",
                1,
                1,
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    (
                        "PSL_ITEM_INFO",
                        "Psl Item Info",
                        1,
                        -1,
                        (
                            ("PSL", "Product/Service Line Item", 1, 1),
                            ("AUT", "Authorization Information", 0, 1),
                            (
                                "PAYER_ADJUSTMENT",
                                "Payer Adjustment",
                                0,
                                -1,
                                (("ADJ", "Adjustment", 1, 1),),
                            ),
                        ),
                    ),
                ),
                (
                    ("IVC", "Invoice Segment", 1, 1),
                    ("PSL_ITEM_INFO", "Psl Item Info", 1, -1),
                ),
            ),
        ),
    ),
    "ESR_U02": (
        "ESR_U02",
        "Automated equipment status request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "ESU_U01": (
        "ESU_U01",
        "Automated equipment status update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            ("ISD", "Interaction Status Detail", 0, -1),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "INR_U06": (
        "INR_U06",
        "Automated equipment inventory request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            ("INV", "Inventory Detail", 1, -1),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "INU_U05": (
        "INU_U05",
        "Automated equipment inventory update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            ("INV", "Inventory Detail", 1, -1),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "LSU_U12": (
        "LSU_U12",
        "Automated equipment log/service update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            ("EQP", "Equipment/log Service", 1, -1),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "MDM_T01": ("MDM_T01", "Original document notification", _MDM_T01),
    "MDM_T02": ("MDM_T02", "Original document notification and content", _MDM_T02),
    "MDM_T03": ("MDM_T01", "Document status change notification", _MDM_T01),
    "MDM_T04": ("MDM_T02", "Document status change notification and content", _MDM_T02),
    "MDM_T05": ("MDM_T01", "Document addendum notification", _MDM_T01),
    "MDM_T06": ("MDM_T02", "Document addendum notification and content", _MDM_T02),
    "MDM_T07": ("MDM_T01", "Document edit notification", _MDM_T01),
    "MDM_T08": ("MDM_T02", "Document edit notification and content", _MDM_T02),
    "MDM_T09": ("MDM_T01", "Document replacement notification", _MDM_T01),
    "MDM_T10": ("MDM_T02", "Document replacement notification and content", _MDM_T02),
    "MDM_T11": ("MDM_T01", "Document cancel notification", _MDM_T01),
    "MFK_M01": (
        "MFK_M01",
        "Master file not otherwise specified",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFN_M02": (
        "MFN_M02",
        "Master file - staff practitioner",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_STAFF",
                "Mf Staff",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("STF", "Staff Identification", 1, 1),
                    ("PRA", "Practitioner Detail", 0, -1),
                    ("ORG", "Practitioner Organization Unit", 0, -1),
                    ("AFF", "Professional Affiliation", 0, -1),
                    ("LAN", "Language Detail", 0, -1),
                    ("EDU", "Educational Detail", 0, -1),
                    ("CER", "Certificate Detail", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    "MFN_M04": (
        "MFN_M04",
        "Master files charge description",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_CDM",
                "Mf CDM",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("CDM", "Charge Description Master", 1, 1),
                    ("PRC", "Pricing", 0, -1),
                ),
            ),
        ),
    ),
    "MFN_M05": (
        "MFN_M05",
        "Patient location master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_LOCATION",
                "Mf Location",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("LOC", "Location Identification", 1, 1),
                    ("LCH", "Location Characteristic", 0, -1),
                    ("LRL", "Location Relationship", 0, -1),
                    (
                        "MF_LOC_DEPT",
                        "Mf Loc Dept",
                        1,
                        -1,
                        (
                            ("LDP", "Location Department", 1, 1),
                            ("LCH", "Location Characteristic", 0, -1),
                            ("LCC", "Location Charge Code", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M06": (
        "MFN_M06",
        "Clinical study with phases and schedules master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_CLIN_STUDY",
                "Mf Clin Study",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("CM0", "Clinical Study Master", 1, 1),
                    (
                        "MF_PHASE_SCHED_DETAIL",
                        "Mf Phase Sched Detail",
                        0,
                        -1,
                        (
                            ("CM1", "Clinical Study Phase Master", 1, 1),
                            ("CM2", "Clinical Study Schedule Master", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M07": (
        "MFN_M07",
        "Clinical study without phases but with schedules master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_CLIN_STUDY_SCHED",
                "Mf Clin Study Sched",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("CM0", "Clinical Study Master", 1, 1),
                    ("CM2", "Clinical Study Schedule Master", 0, -1),
                ),
            ),
        ),
    ),
    "MFN_M08": (
        "MFN_M08",
        "Test/observation (numeric) master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_NUMERIC",
                "Mf Test Numeric",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    ("OM2", "Numeric Observation", 0, 1),
                    ("OM3", "Categorical Service/Test/Observation", 0, 1),
                    ("OM4", "Observations that Require Specimens", 0, 1),
                ),
            ),
        ),
    ),
    "MFN_M09": (
        "MFN_M09",
        "Test/observation (categorical) master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_CATEGORICAL",
                "Mf Test Categorical",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    (
                        "MF_TEST_CAT_DETAIL",
                        "Mf Test Cat Detail",
                        0,
                        1,
                        (
                            ("OM3", "Categorical Service/Test/Observation", 1, 1),
                            ("OM4", "Observations that Require Specimens", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M10": (
        "MFN_M10",
        "Test/observation batteries master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_BATTERIES",
                "Mf Test Batteries",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    (
                        "MF_TEST_BATT_DETAIL",
                        "Mf Test Batt Detail",
                        0,
                        1,
                        (
                            ("OM5", "Observation Batteries (Sets)", 1, 1),
                            ("OM4", "Observations that Require Specimens", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M11": (
        "MFN_M11",
        "Test/calculated observations master file",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_CALCULATED",
                "Mf Test Calculated",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    (
                        "MF_TEST_CALC_DETAIL",
                        "Mf Test Calc Detail",
                        0,
                        1,
                        (
                            (
                                "OM6",
                                "Observations that are Calculated from Other Observations",
                                1,
                                1,
                            ),
                            ("OM2", "Numeric Observation", 1, 1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M12": (
        "MFN_M12",
        "Master file notification message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_OBS_ATTRIBUTES",
                "Mf Obs Attributes",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    ("OM7", "Additional Basic Attributes", 0, 1),
                ),
            ),
        ),
    ),
    "MFN_M13": (
        "MFN_M13",
        "Master file notification - general",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFE", "Master File Entry", 1, -1),
        ),
    ),
    "MFN_M15": (
        "MFN_M15",
        "Inventory item master file notification",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_INV_ITEM",
                "Mf Inv Item",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("IIM", "Inventory Item Master", 1, 1),
                ),
            ),
        ),
    ),
    "MFN_M16": (
        "MFN_M16",
        "Master file notification inventory item enhanced",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MATERIAL_ITEM_RECORD",
                "Material Item Record",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("ITM", "Material Item", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "STERILIZATION",
                        "Sterilization",
                        0,
                        -1,
                        (
                            ("STZ", "Sterilization Parameter", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PURCHASING_VENDOR",
                        "Purchasing Vendor",
                        0,
                        -1,
                        (
                            ("VND", "Purchasing Vendor", 1, 1),
                            (
                                "PACKAGING",
                                "Packaging",
                                0,
                                -1,
                                (
                                    ("PKG", "Item Packaging", 1, 1),
                                    (
                                        "PCE",
                                        "Patient Charge Cost Center Exceptions",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "MATERIAL_LOCATION",
                        "Material Location",
                        0,
                        -1,
                        (
                            ("IVT", "Material Location", 1, 1),
                            ("ILT", "Material Lot", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M17": (
        "MFN_M17",
        "DRG master file message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_DRG",
                "Mf DRG",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("DMI", "DRG Master File Information", 1, 1),
                ),
            ),
        ),
    ),
    "MFN_Znn": (
        "MFN_Znn",
        "Master file notification message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MFN_ZNN_MF_SITE_DEFINED",
                "Mfn Znn Mf Site Defined",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                ),
            ),
        ),
    ),
    "NMD_N02": (
        "NMD_N02",
        "Application management data message (unsolicited)",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "CLOCK_AND_STATS_WITH_NOTES",
                "Clock And Stats With Notes",
                1,
                -1,
                (
                    (
                        "CLOCK",
                        "Clock",
                        0,
                        1,
                        (
                            ("NCK", "System Clock", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "APP_STATS",
                        "App Stats",
                        0,
                        1,
                        (
                            ("NST", "Application Control Level Statistics", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "APP_STATUS",
                        "App Status",
                        0,
                        1,
                        (
                            ("NSC", "Application Status Change", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "OMB_O27": (
        "OMB_O27",
        "Blood product order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("BPO", "Blood Product Order", 1, 1),
                    ("SPM", "Specimen", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMD_O03": (
        "OMD_O03",
        "Diet order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER_DIET",
                "Order Diet",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING_DIET",
                        "Timing Diet",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "DIET",
                        "Diet",
                        0,
                        1,
                        (
                            (
                                "ODS",
                                "Dietary Orders, Supplements, and Preferences",
                                1,
                                -1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            (
                "ORDER_TRAY",
                "Order Tray",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING_TRAY",
                        "Timing Tray",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("ODT", "Diet Tray Instructions", 1, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    "OMG_O19": (
        "OMG_O19",
        "General clinical order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("OBR", "Observation Request", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRT", "Participation Information", 0, -1),
                    ("CTD", "Contact Data", 0, 1),
                    ("DG1", "Diagnosis", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "SPECIMEN",
                        "Specimen",
                        0,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "CONTAINER",
                                "Container",
                                0,
                                -1,
                                (
                                    ("SAC", "Specimen Container Detail", 1, 1),
                                    (
                                        "CONTAINER_OBSERVATION",
                                        "Container Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "PRIOR_RESULT",
                        "Prior Result",
                        0,
                        -1,
                        (
                            (
                                "PATIENT_PRIOR",
                                "Patient Prior",
                                0,
                                1,
                                (
                                    ("PID", "Patient Identification", 1, 1),
                                    ("PD1", "Patient Additional Demographic", 0, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "PATIENT_VISIT_PRIOR",
                                "Patient Visit Prior",
                                0,
                                1,
                                (
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("AL1", "Patient Allergy Information", 0, -1),
                            (
                                "ORDER_PRIOR",
                                "Order Prior",
                                1,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    ("OBR", "Observation Request", 1, 1),
                                    (
                                        "TIMING_PRIOR",
                                        "Timing Prior",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("CTD", "Contact Data", 0, 1),
                                    (
                                        "OBSERVATION_PRIOR",
                                        "Observation Prior",
                                        1,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMI_O23": (
        "OMI_O23",
        "Imaging order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("OBR", "Observation Request", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRT", "Participation Information", 0, -1),
                    ("CTD", "Contact Data", 0, 1),
                    ("DG1", "Diagnosis", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("IPC", "Imaging Procedure Control Segment", 1, -1),
                ),
            ),
        ),
    ),
    "OML_O21": (
        "OML_O21",
        "Laboratory order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "OBSERVATION_REQUEST",
                        "Observation Request",
                        0,
                        1,
                        (
                            ("OBR", "Observation Request", 1, 1),
                            ("TCD", "Test Code Detail", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                            ("CTD", "Contact Data", 0, 1),
                            ("DG1", "Diagnosis", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("TCD", "Test Code Detail", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "SPECIMEN",
                                "Specimen",
                                0,
                                -1,
                                (
                                    ("SPM", "Specimen", 1, 1),
                                    (
                                        "SPECIMEN_OBSERVATION",
                                        "Specimen Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "CONTAINER",
                                        "Container",
                                        0,
                                        -1,
                                        (
                                            ("SAC", "Specimen Container Detail", 1, 1),
                                            (
                                                "CONTAINER_OBSERVATION",
                                                "Container Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "PRIOR_RESULT",
                                "Prior Result",
                                0,
                                -1,
                                (
                                    (
                                        "PATIENT_PRIOR",
                                        "Patient Prior",
                                        0,
                                        1,
                                        (
                                            ("PID", "Patient Identification", 1, 1),
                                            (
                                                "PD1",
                                                "Patient Additional Demographic",
                                                0,
                                                1,
                                            ),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PATIENT_VISIT_PRIOR",
                                        "Patient Visit Prior",
                                        0,
                                        1,
                                        (
                                            ("PV1", "Patient Visit", 1, 1),
                                            (
                                                "PV2",
                                                "Patient Visit - Additional Information",
                                                0,
                                                1,
                                            ),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    ("AL1", "Patient Allergy Information", 0, -1),
                                    (
                                        "ORDER_PRIOR",
                                        "Order Prior",
                                        1,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            ("OBR", "Observation Request", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "TIMING_PRIOR",
                                                "Timing Prior",
                                                0,
                                                -1,
                                                (
                                                    ("TQ1", "Timing/Quantity", 1, 1),
                                                    (
                                                        "TQ2",
                                                        "Timing/Quantity Relationship",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "OBSERVATION_PRIOR",
                                                "Observation Prior",
                                                1,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OML_O33": (
        "OML_O33",
        "Laboratory order for multiple orders related to a single specimen",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "SPECIMEN",
                "Specimen",
                1,
                -1,
                (
                    ("SPM", "Specimen", 1, 1),
                    (
                        "SPECIMEN_OBSERVATION",
                        "Specimen Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    ("SAC", "Specimen Container Detail", 0, -1),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "OBSERVATION_REQUEST",
                                "Observation Request",
                                0,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("TCD", "Test Code Detail", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("DG1", "Diagnosis", 0, -1),
                                    (
                                        "OBSERVATION",
                                        "Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            ("TCD", "Test Code Detail", 0, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PRIOR_RESULT",
                                        "Prior Result",
                                        0,
                                        -1,
                                        (
                                            (
                                                "PATIENT_PRIOR",
                                                "Patient Prior",
                                                0,
                                                1,
                                                (
                                                    (
                                                        "PID",
                                                        "Patient Identification",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "PD1",
                                                        "Patient Additional Demographic",
                                                        0,
                                                        1,
                                                    ),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "PATIENT_VISIT_PRIOR",
                                                "Patient Visit Prior",
                                                0,
                                                1,
                                                (
                                                    ("PV1", "Patient Visit", 1, 1),
                                                    (
                                                        "PV2",
                                                        "Patient Visit - Additional Information",
                                                        0,
                                                        1,
                                                    ),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "AL1",
                                                "Patient Allergy Information",
                                                0,
                                                -1,
                                            ),
                                            (
                                                "ORDER_PRIOR",
                                                "Order Prior",
                                                1,
                                                -1,
                                                (
                                                    ("ORC", "Common Order", 1, 1),
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                    (
                                                        "TIMING_PRIOR",
                                                        "Timing Prior",
                                                        0,
                                                        -1,
                                                        (
                                                            (
                                                                "TQ1",
                                                                "Timing/Quantity",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "TQ2",
                                                                "Timing/Quantity Relationship",
                                                                0,
                                                                -1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "OBSERVATION_PRIOR",
                                                        "Observation Prior",
                                                        1,
                                                        -1,
                                                        (
                                                            (
                                                                "OBX",
                                                                "Observation/Result",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "PRT",
                                                                "Participation Information",
                                                                0,
                                                                -1,
                                                            ),
                                                            (
                                                                "NTE",
                                                                "Notes and Comments",
                                                                0,
                                                                -1,
                                                            ),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                            ("FT1", "Financial Transaction", 0, -1),
                            ("CTI", "Clinical Trial Identification", 0, -1),
                            ("BLG", "Billing", 0, 1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "OML_O35": (
        "OML_O35",
        "Laboratory order for multiple orders related to a single container of a specimen",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "SPECIMEN",
                "Specimen",
                1,
                -1,
                (
                    ("SPM", "Specimen", 1, 1),
                    (
                        "SPECIMEN_OBSERVATION",
                        "Specimen Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "SPECIMEN_CONTAINER",
                        "Specimen Container",
                        1,
                        -1,
                        (
                            ("SAC", "Specimen Container Detail", 1, 1),
                            (
                                "ORDER",
                                "Order",
                                1,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "OBSERVATION_REQUEST",
                                        "Observation Request",
                                        0,
                                        1,
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("TCD", "Test Code Detail", 0, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("PRT", "Participation Information", 0, -1),
                                            ("DG1", "Diagnosis", 0, -1),
                                            (
                                                "OBSERVATION",
                                                "Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                    ("TCD", "Test Code Detail", 0, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "PRIOR_RESULT",
                                                "Prior Result",
                                                0,
                                                -1,
                                                (
                                                    (
                                                        "PATIENT_PRIOR",
                                                        "Patient Prior",
                                                        0,
                                                        1,
                                                        (
                                                            (
                                                                "PID",
                                                                "Patient Identification",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "PD1",
                                                                "Patient Additional Demographic",
                                                                0,
                                                                1,
                                                            ),
                                                            (
                                                                "PRT",
                                                                "Participation Information",
                                                                0,
                                                                -1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "PATIENT_VISIT_PRIOR",
                                                        "Patient Visit Prior",
                                                        0,
                                                        1,
                                                        (
                                                            (
                                                                "PV1",
                                                                "Patient Visit",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "PV2",
                                                                "Patient Visit - Additional Information",
                                                                0,
                                                                1,
                                                            ),
                                                            (
                                                                "PRT",
                                                                "Participation Information",
                                                                0,
                                                                -1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "AL1",
                                                        "Patient Allergy Information",
                                                        0,
                                                        -1,
                                                    ),
                                                    (
                                                        "ORDER_PRIOR",
                                                        "Order Prior",
                                                        1,
                                                        -1,
                                                        (
                                                            (
                                                                "ORC",
                                                                "Common Order",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "OBR",
                                                                "Observation Request",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "NTE",
                                                                "Notes and Comments",
                                                                0,
                                                                -1,
                                                            ),
                                                            (
                                                                "PRT",
                                                                "Participation Information",
                                                                0,
                                                                -1,
                                                            ),
                                                            (
                                                                "TIMING_PRIOR",
                                                                "Timing Prior",
                                                                0,
                                                                -1,
                                                                (
                                                                    (
                                                                        "TQ1",
                                                                        "Timing/Quantity",
                                                                        1,
                                                                        1,
                                                                    ),
                                                                    (
                                                                        "TQ2",
                                                                        "Timing/Quantity Relationship",
                                                                        0,
                                                                        -1,
                                                                    ),
                                                                ),
                                                            ),
                                                            (
                                                                "OBSERVATION_PRIOR",
                                                                "Observation Prior",
                                                                1,
                                                                -1,
                                                                (
                                                                    (
                                                                        "OBX",
                                                                        "Observation/Result",
                                                                        1,
                                                                        1,
                                                                    ),
                                                                    (
                                                                        "PRT",
                                                                        "Participation Information",
                                                                        0,
                                                                        -1,
                                                                    ),
                                                                    (
                                                                        "NTE",
                                                                        "Notes and Comments",
                                                                        0,
                                                                        -1,
                                                                    ),
                                                                ),
                                                            ),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                    ("FT1", "Financial Transaction", 0, -1),
                                    ("CTI", "Clinical Trial Identification", 0, -1),
                                    ("BLG", "Billing", 0, 1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "OML_O39": (
        "OML_O39",
        "Specimen shipment centric laboratory order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "OBSERVATION_REQUEST",
                        "Observation Request",
                        0,
                        1,
                        (
                            ("OBR", "Observation Request", 1, 1),
                            ("TCD", "Test Code Detail", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                            ("CTD", "Contact Data", 0, 1),
                            ("DG1", "Diagnosis", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("TCD", "Test Code Detail", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "SPECIMEN_SHIPMENT",
                                "Specimen Shipment",
                                0,
                                -1,
                                (
                                    ("SHP", "Shipment", 1, 1),
                                    (
                                        "SHIPMENT_OBSERVATION",
                                        "Shipment Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PACKAGE",
                                        "Package",
                                        1,
                                        -1,
                                        (
                                            ("PAC", "Shipment Package", 1, 1),
                                            (
                                                "SPECIMEN_IN_PACKAGE",
                                                "Specimen In Package",
                                                0,
                                                -1,
                                                (
                                                    ("SPM", "Specimen", 1, 1),
                                                    (
                                                        "SPECIMEN_OBSERVATION",
                                                        "Specimen Observation",
                                                        0,
                                                        -1,
                                                        (
                                                            (
                                                                "OBX",
                                                                "Observation/Result",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "PRT",
                                                                "Participation Information",
                                                                0,
                                                                -1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "SPECIMEN_CONTAINER_IN_PACKAGE",
                                                        "Specimen Container In Package",
                                                        0,
                                                        -1,
                                                        (
                                                            (
                                                                "SAC",
                                                                "Specimen Container Detail",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "CONTAINER_OBSERVATION",
                                                                "Container Observation",
                                                                0,
                                                                -1,
                                                                (
                                                                    (
                                                                        "OBX",
                                                                        "Observation/Result",
                                                                        1,
                                                                        1,
                                                                    ),
                                                                    (
                                                                        "PRT",
                                                                        "Participation Information",
                                                                        0,
                                                                        -1,
                                                                    ),
                                                                ),
                                                            ),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMN_O07": (
        "OMN_O07",
        "Non-stock requisition order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("RQD", "Requisition Detail", 1, 1),
                    ("RQ1", "Requisition Detail-1", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMP_O09": (
        "OMP_O09",
        "Pharmacy/treatment order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "ADDITIONAL_DEMOGRAPHICS",
                        "Additional Demographics",
                        0,
                        1,
                        (
                            ("PD1", "Patient Additional Demographic", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                    (
                        "COMPONENT",
                        "Component",
                        0,
                        -1,
                        (
                            ("RXC", "Pharmacy/Treatment Component Order", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMS_O05": (
        "OMS_O05",
        "Stock requisition order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("GT1", "Guarantor", 0, 1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("RQD", "Requisition Detail", 1, 1),
                    ("RQ1", "Requisition Detail-1", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OPL_O37": (
        "OPL_O37",
        "Population/location-based laboratory order message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("PRT", "Participation Information", 1, -1),
            (
                "GUARANTOR",
                "Guarantor",
                0,
                1,
                (("GT1", "Guarantor", 1, 1), ("NTE", "Notes and Comments", 0, -1)),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("NK1", "Next of Kin / Associated Parties", 1, -1),
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "OBSERVATIONS_ON_PATIENT",
                                "Observations On Patient",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "INSURANCE",
                                "Insurance",
                                0,
                                -1,
                                (
                                    ("IN1", "Insurance", 1, 1),
                                    ("IN2", "Insurance Additional Information", 0, 1),
                                    (
                                        "IN3",
                                        "Insurance Additional Information, Certification",
                                        0,
                                        1,
                                    ),
                                ),
                            ),
                            ("AL1", "Patient Allergy Information", 0, -1),
                        ),
                    ),
                    (
                        "SPECIMEN",
                        "Specimen",
                        1,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "CONTAINER",
                                "Container",
                                0,
                                -1,
                                (
                                    ("SAC", "Specimen Container Detail", 1, 1),
                                    (
                                        "CONTAINER_OBSERVATION",
                                        "Container Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "OBSERVATION_REQUEST",
                                "Observation Request",
                                1,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    ("OBR", "Observation Request", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("TCD", "Test Code Detail", 0, 1),
                                    ("DG1", "Diagnosis", 0, -1),
                                    (
                                        "ORDER_RELATED_OBSERVATION",
                                        "Order Related Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "PRIOR_RESULT",
                        "Prior Result",
                        0,
                        1,
                        (
                            ("NK1", "Next of Kin / Associated Parties", 1, -1),
                            (
                                "PATIENT_PRIOR",
                                "Patient Prior",
                                0,
                                1,
                                (
                                    ("PID", "Patient Identification", 1, 1),
                                    ("PD1", "Patient Additional Demographic", 0, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "PATIENT_VISIT_PRIOR",
                                "Patient Visit Prior",
                                0,
                                1,
                                (
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("AL1", "Patient Allergy Information", 0, 1),
                            (
                                "ORDER_PRIOR",
                                "Order Prior",
                                1,
                                -1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ORC", "Common Order", 0, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "OBSERVATION_RESULT",
                                        "Observation Result",
                                        1,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OPR_O38": (
        "OPR_O38",
        "Population/location-based laboratory order acknowledgment message",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("NK1", "Next of Kin / Associated Parties", 1, -1),
                            ("PID", "Patient Identification", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "SPECIMEN",
                                "Specimen",
                                0,
                                -1,
                                (
                                    ("SPM", "Specimen", 1, 1),
                                    (
                                        "SPECIMEN_OBSERVATION",
                                        "Specimen Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    ("SAC", "Specimen Container Detail", 0, -1),
                                    (
                                        "OBSERVATION_REQUEST",
                                        "Observation Request",
                                        0,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            ("OBR", "Observation Request", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "OPU_R25": (
        "OPU_R25",
        "Unsolicited population/location-based laboratory observation message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("PRT", "Participation Information", 0, -1),
            (
                "PATIENT_VISIT_OBSERVATION",
                "Patient Visit Observation",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            (
                "ACCESSION_DETAIL",
                "Accession Detail",
                1,
                -1,
                (
                    ("NK1", "Next of Kin / Associated Parties", 1, -1),
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "PATIENT_OBSERVATION",
                                "Patient Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "SPECIMEN",
                        "Specimen",
                        1,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "CONTAINER",
                                "Container",
                                0,
                                -1,
                                (
                                    ("SAC", "Specimen Container Detail", 1, 1),
                                    ("INV", "Inventory Detail", 0, 1),
                                ),
                            ),
                            (
                                "ORDER",
                                "Order",
                                1,
                                -1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ORC", "Common Order", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING_QTY",
                                        "Timing Qty",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "RESULT",
                                        "Result",
                                        1,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORA_R33": (
        "ORA_R33",
        "Observation report acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("ORC", "Common Order", 0, 1),
        ),
    ),
    "ORB_O28": (
        "ORB_O28",
        "Blood product order acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("BPO", "Blood Product Order", 0, 1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORD_O04": (
        "ORD_O04",
        "Diet order acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER_DIET",
                        "Order Diet",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING_DIET",
                                "Timing Diet",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ODS",
                                "Dietary Orders, Supplements, and Preferences",
                                0,
                                -1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER_TRAY",
                        "Order Tray",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING_TRAY",
                                "Timing Tray",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("ODT", "Diet Tray Instructions", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORG_O20": (
        "ORG_O20",
        "General clinical order response",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "OBSERVATION_GROUP",
                                "Observation Group",
                                0,
                                1,
                                (("OBR", "Observation Request", 1, 1),),
                            ),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("CTI", "Clinical Trial Identification", 0, -1),
                            (
                                "SPECIMEN",
                                "Specimen",
                                0,
                                -1,
                                (
                                    ("SPM", "Specimen", 1, 1),
                                    ("SAC", "Specimen Container Detail", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORI_O24": (
        "ORI_O24",
        "Imaging order response message to any OMI",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                            ("IPC", "Imaging Procedure Control Segment", 1, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORL_O22": (
        "ORL_O22",
        "General laboratory order response message to any OML",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "ORDER",
                        "Order",
                        0,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "OBSERVATION_REQUEST",
                                "Observation Request",
                                0,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "SPECIMEN",
                                        "Specimen",
                                        0,
                                        -1,
                                        (
                                            ("SPM", "Specimen", 1, 1),
                                            ("SAC", "Specimen Container Detail", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORL_O34": (
        "ORL_O34",
        "Laboratory order response message to a multiple order related to single specimen OML",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "SPECIMEN",
                        "Specimen",
                        1,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("SAC", "Specimen Container Detail", 0, -1),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "OBSERVATION_REQUEST",
                                        "Observation Request",
                                        0,
                                        1,
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORL_O36": (
        "ORL_O36",
        "Laboratory order response message to a single container of a specimen OML",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "SPECIMEN",
                        "Specimen",
                        1,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "SPECIMEN_CONTAINER",
                                "Specimen Container",
                                1,
                                -1,
                                (
                                    ("SAC", "Specimen Container Detail", 1, 1),
                                    (
                                        "ORDER",
                                        "Order",
                                        0,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "TIMING",
                                                "Timing",
                                                0,
                                                -1,
                                                (
                                                    ("TQ1", "Timing/Quantity", 1, 1),
                                                    (
                                                        "TQ2",
                                                        "Timing/Quantity Relationship",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "OBSERVATION_REQUEST",
                                                "Observation Request",
                                                0,
                                                1,
                                                (
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORL_O40": (
        "ORL_O40",
        "Specimen shipment centric laboratory order response",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING",
                                        "Timing",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "OBSERVATION_REQUEST",
                                        "Observation Request",
                                        0,
                                        1,
                                        (
                                            ("OBR", "Observation Request", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "SPECIMEN_SHIPMENT",
                                                "Specimen Shipment",
                                                0,
                                                -1,
                                                (
                                                    ("SHP", "Shipment", 1, 1),
                                                    (
                                                        "PACKAGE",
                                                        "Package",
                                                        1,
                                                        -1,
                                                        (
                                                            (
                                                                "PAC",
                                                                "Shipment Package",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "SPECIMEN_IN_PACKAGE",
                                                                "Specimen In Package",
                                                                0,
                                                                -1,
                                                                (
                                                                    (
                                                                        "SPM",
                                                                        "Specimen",
                                                                        1,
                                                                        1,
                                                                    ),
                                                                    (
                                                                        "SPECIMEN_CONTAINER_IN_PACKAGE",
                                                                        "Specimen Container In Package",
                                                                        0,
                                                                        -1,
                                                                        (
                                                                            (
                                                                                "SAC",
                                                                                "Specimen Container Detail",
                                                                                1,
                                                                                1,
                                                                            ),
                                                                        ),
                                                                    ),
                                                                ),
                                                            ),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORN_O08": (
        "ORN_O08",
        "Non-stock requisition acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RQD", "Requisition Detail", 1, 1),
                            ("RQ1", "Requisition Detail-1", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORP_O10": (
        "ORP_O10",
        "Pharmacy/treatment order acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENT",
                                        "Component",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORS_O06": (
        "ORS_O06",
        "Stock requisition acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RQD", "Requisition Detail", 1, 1),
                            ("RQ1", "Requisition Detail-1", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORU_R01": (
        "ORU_R01",
        "Unsolicited transmission of an observation message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "PATIENT_RESULT",
                "Patient Result",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("NK1", "Next of Kin / Associated Parties", 0, -1),
                            (
                                "PATIENT_OBSERVATION",
                                "Patient Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "VISIT",
                                "Visit",
                                0,
                                1,
                                (
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "ORDER_OBSERVATION",
                        "Order Observation",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 0, 1),
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING_QTY",
                                "Timing Qty",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("CTD", "Contact Data", 0, 1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            ("FT1", "Financial Transaction", 0, -1),
                            ("CTI", "Clinical Trial Identification", 0, -1),
                            (
                                "SPECIMEN",
                                "Specimen",
                                0,
                                -1,
                                (
                                    ("SPM", "Specimen", 1, 1),
                                    (
                                        "PATIENT_OBSERVATION",
                                        "Patient Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "ORU_R30": (
        "ORU_R30",
        "Unsolicited point-of-care observation message without existing order - place an order",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PRT", "Participation Information", 0, -1),
            (
                "PATIENT_OBSERVATION",
                "Patient Observation",
                0,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            (
                "VISIT",
                "Visit",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                ),
            ),
            ("ORC", "Common Order", 1, 1),
            ("OBR", "Observation Request", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("PRT", "Participation Information", 0, -1),
            (
                "TIMING_QTY",
                "Timing Qty",
                0,
                -1,
                (
                    ("TQ1", "Timing/Quantity", 1, 1),
                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                ),
            ),
            (
                "OBSERVATION",
                "Observation",
                1,
                -1,
                (
                    ("OBX", "Observation/Result", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    "OSM_R26": (
        "OSM_R26",
        "Unsolicited specimen shipment manifest message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "SHIPMENT",
                "Shipment",
                1,
                -1,
                (
                    ("SHP", "Shipment", 1, 1),
                    ("PRT", "Participation Information", 1, -1),
                    (
                        "SHIPPING_OBSERVATION",
                        "Shipping Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "PACKAGE",
                        "Package",
                        1,
                        -1,
                        (
                            ("PAC", "Shipment Package", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "SPECIMEN",
                                "Specimen",
                                0,
                                -1,
                                (
                                    ("SPM", "Specimen", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "SPECIMEN_OBSERVATION",
                                        "Specimen Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    (
                                        "CONTAINER",
                                        "Container",
                                        0,
                                        -1,
                                        (
                                            ("SAC", "Specimen Container Detail", 1, 1),
                                            (
                                                "CONTAINER_OBSERVATION",
                                                "Container Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                    (
                                        "SUBJECT_PERSON_ANIMAL_IDENTIFICATION",
                                        "Subject Person Animal Identification",
                                        0,
                                        1,
                                        (
                                            ("PID", "Patient Identification", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "PATIENT_OBSERVATION",
                                                "Patient Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "NK1",
                                                "Next of Kin / Associated Parties",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "SUBJECT_POPULATION_LOCATION_IDENTIFICATION",
                                        "Subject Population Location Identification",
                                        0,
                                        1,
                                        (
                                            ("PV1", "Patient Visit", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            (
                                                "PATIENT_VISIT_OBSERVATION",
                                                "Patient Visit Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "PATIENT_INFORMATION",
                                                "Patient Information",
                                                0,
                                                1,
                                                (
                                                    (
                                                        "PID",
                                                        "Patient Identification",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "PRT",
                                                        "Participation Information",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                            (
                                                "NK1",
                                                "Next of Kin / Associated Parties",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "OUL_R22": (
        "OUL_R22",
        "Unsolicited specimen oriented observation message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, 1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_OBSERVATION",
                        "Patient Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "VISIT",
                        "Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "SPECIMEN",
                "Specimen",
                1,
                -1,
                (
                    ("SPM", "Specimen", 1, 1),
                    (
                        "SPECIMEN_OBSERVATION",
                        "Specimen Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "CONTAINER",
                        "Container",
                        0,
                        -1,
                        (
                            ("SAC", "Specimen Container Detail", 1, 1),
                            ("INV", "Inventory Detail", 0, 1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("OBR", "Observation Request", 1, 1),
                            ("ORC", "Common Order", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING_QTY",
                                "Timing Qty",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "RESULT",
                                "Result",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("TCD", "Test Code Detail", 0, 1),
                                    ("SID", "Substance Identifier", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            ("CTI", "Clinical Trial Identification", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "OUL_R23": (
        "OUL_R23",
        "Unsolicited specimen container oriented observation message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, 1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_OBSERVATION",
                        "Patient Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "VISIT",
                        "Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "SPECIMEN",
                "Specimen",
                1,
                -1,
                (
                    ("SPM", "Specimen", 1, 1),
                    (
                        "SPECIMEN_OBSERVATION",
                        "Specimen Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "CONTAINER",
                        "Container",
                        1,
                        -1,
                        (
                            ("SAC", "Specimen Container Detail", 1, 1),
                            ("INV", "Inventory Detail", 0, 1),
                            (
                                "ORDER",
                                "Order",
                                1,
                                -1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("ORC", "Common Order", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("PRT", "Participation Information", 0, -1),
                                    (
                                        "TIMING_QTY",
                                        "Timing Qty",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    (
                                        "RESULT",
                                        "Result",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("PRT", "Participation Information", 0, -1),
                                            ("TCD", "Test Code Detail", 0, 1),
                                            ("SID", "Substance Identifier", 0, -1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                    ("CTI", "Clinical Trial Identification", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "OUL_R24": (
        "OUL_R24",
        "Unsolicited order oriented observation message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, 1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT_OBSERVATION",
                        "Patient Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    (
                        "VISIT",
                        "Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("OBR", "Observation Request", 1, 1),
                    ("ORC", "Common Order", 0, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "TIMING_QTY",
                        "Timing Qty",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "SPECIMEN",
                        "Specimen",
                        0,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            (
                                "SPECIMEN_OBSERVATION",
                                "Specimen Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            (
                                "CONTAINER",
                                "Container",
                                0,
                                -1,
                                (
                                    ("SAC", "Specimen Container Detail", 1, 1),
                                    ("INV", "Inventory Detail", 0, 1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "RESULT",
                        "Result",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("TCD", "Test Code Detail", 0, 1),
                            ("SID", "Substance Identifier", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "PEX_P07": (
        "PEX_P07",
        "Unsolicited initial individual product experience report",
        _PEX_P07,
    ),
    "PEX_P08": (
        "PEX_P07",
        "Unsolicited update individual product experience report",
        _PEX_P07,
    ),
    "PGL_PC6": ("PGL_PC6", "PC/goal add", _PGL_PC6),
    "PGL_PC7": ("PGL_PC6", "PC/goal update", _PGL_PC6),
    "PGL_PC8": ("PGL_PC6", "PC/goal delete", _PGL_PC6),
    "PMU_B01": ("PMU_B01", "Add personnel record", _PMU_B01),
    "PMU_B02": ("PMU_B01", "Update personnel record", _PMU_B01),
    "PMU_B03": (
        "PMU_B03",
        "Delete personnel record",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("STF", "Staff Identification", 1, 1),
        ),
    ),
    "PMU_B04": ("PMU_B04", "Active practicing person", _PMU_B04),
    "PMU_B05": ("PMU_B04", "Deactivate practicing person", _PMU_B04),
    "PMU_B06": ("PMU_B04", "Terminate practicing person", _PMU_B04),
    "PMU_B07": (
        "PMU_B07",
        "Grant certificate/permission",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("STF", "Staff Identification", 1, 1),
            ("PRA", "Practitioner Detail", 0, 1),
            (
                "CERTIFICATE",
                "Certificate",
                0,
                -1,
                (("CER", "Certificate Detail", 1, 1), ("ROL", "Role", 0, -1)),
            ),
        ),
    ),
    "PMU_B08": (
        "PMU_B08",
        "Revoke certificate/permission",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EVN", "Event Type", 1, 1),
            ("STF", "Staff Identification", 1, 1),
            ("PRA", "Practitioner Detail", 0, 1),
            ("CER", "Certificate Detail", 0, -1),
        ),
    ),
    "PPG_PCG": ("PPG_PCG", "PC/pathway (goal-oriented) add", _PPG_PCG),
    "PPG_PCH": ("PPG_PCG", "PC/pathway (goal-oriented) update", _PPG_PCG),
    "PPG_PCJ": ("PPG_PCG", "PC/pathway (goal-oriented) delete", _PPG_PCG),
    "PPP_PCB": ("PPP_PCB", "PC/pathway (problem-oriented) add", _PPP_PCB),
    "PPP_PCC": ("PPP_PCB", "PC/pathway (problem-oriented) update", _PPP_PCB),
    "PPP_PCD": ("PPP_PCB", "PC/pathway (problem-oriented) delete", _PPP_PCB),
    "PPR_PC1": ("PPR_PC1", "PC/problem add", _PPR_PC1),
    "PPR_PC2": ("PPR_PC1", "PC/problem update", _PPR_PC1),
    "PPR_PC3": ("PPR_PC1", "PC/problem delete", _PPR_PC1),
    "PPT_PCL": (
        "PPT_PCL",
        "PC/pathway (goal-oriented) query response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "PATHWAY",
                        "Pathway",
                        1,
                        -1,
                        (
                            ("PTH", "Pathway", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "PATHWAY_ROLE",
                                "Pathway Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "GOAL",
                                "Goal",
                                0,
                                -1,
                                (
                                    ("GOL", "Goal Detail", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "GOAL_ROLE",
                                        "Goal Role",
                                        0,
                                        -1,
                                        (
                                            ("ROL", "Role", 1, 1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                    (
                                        "GOAL_OBSERVATION",
                                        "Goal Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PROBLEM",
                                        "Problem",
                                        0,
                                        -1,
                                        (
                                            ("PRB", "Problem Details", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                            (
                                                "PROBLEM_ROLE",
                                                "Problem Role",
                                                0,
                                                -1,
                                                (
                                                    ("ROL", "Role", 1, 1),
                                                    ("VAR", "Variance", 0, -1),
                                                ),
                                            ),
                                            (
                                                "PROBLEM_OBSERVATION",
                                                "Problem Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                    (
                                        "ORDER",
                                        "Order",
                                        0,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            (
                                                "ORDER_DETAIL",
                                                "Order Detail",
                                                0,
                                                1,
                                                (
                                                    (
                                                        "CHOICE",
                                                        "Choice",
                                                        1,
                                                        1,
                                                        (
                                                            (
                                                                "OBR",
                                                                "Observation Request",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "ANYHL7SEGMENT",
                                                                "Any HL7 Segment",
                                                                1,
                                                                1,
                                                            ),
                                                        ),
                                                        (
                                                            (
                                                                "OBR",
                                                                "Observation Request",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "ANYHL7SEGMENT",
                                                                "Any HL7 Segment",
                                                                1,
                                                                1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                    ("VAR", "Variance", 0, -1),
                                                    (
                                                        "ORDER_OBSERVATION",
                                                        "Order Observation",
                                                        0,
                                                        -1,
                                                        (
                                                            (
                                                                "OBX",
                                                                "Observation/Result",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "NTE",
                                                                "Notes and Comments",
                                                                0,
                                                                -1,
                                                            ),
                                                            ("VAR", "Variance", 0, -1),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "PPV_PCA": (
        "PPV_PCA",
        "PC/goal response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "GOAL",
                        "Goal",
                        1,
                        -1,
                        (
                            ("GOL", "Goal Detail", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "GOAL_ROLE",
                                "Goal Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "GOAL_PATHWAY",
                                "Goal Pathway",
                                0,
                                -1,
                                (("PTH", "Pathway", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "GOAL_OBSERVATION",
                                "Goal Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "PROBLEM",
                                "Problem",
                                0,
                                -1,
                                (
                                    ("PRB", "Problem Details", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "PROBLEM_ROLE",
                                        "Problem Role",
                                        0,
                                        -1,
                                        (
                                            ("ROL", "Role", 1, 1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PROBLEM_OBSERVATION",
                                        "Problem Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    (
                                        "ORDER_DETAIL",
                                        "Order Detail",
                                        0,
                                        1,
                                        (
                                            (
                                                "CHOICE",
                                                "Choice",
                                                1,
                                                1,
                                                (
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "ANYHL7SEGMENT",
                                                        "Any HL7 Segment",
                                                        1,
                                                        1,
                                                    ),
                                                ),
                                                (
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "ANYHL7SEGMENT",
                                                        "Any HL7 Segment",
                                                        1,
                                                        1,
                                                    ),
                                                ),
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                            (
                                                "ORDER_OBSERVATION",
                                                "Order Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                    ("VAR", "Variance", 0, -1),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "PRR_PC5": (
        "PRR_PC5",
        "PC/problem response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "PROBLEM",
                        "Problem",
                        1,
                        -1,
                        (
                            ("PRB", "Problem Details", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "PROBLEM_ROLE",
                                "Problem Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "PROBLEM_PATHWAY",
                                "Problem Pathway",
                                0,
                                -1,
                                (("PTH", "Pathway", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "PROBLEM_OBSERVATION",
                                "Problem Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                            (
                                "GOAL",
                                "Goal",
                                0,
                                -1,
                                (
                                    ("GOL", "Goal Detail", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "GOAL_ROLE",
                                        "Goal Role",
                                        0,
                                        -1,
                                        (
                                            ("ROL", "Role", 1, 1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                    (
                                        "GOAL_OBSERVATION",
                                        "Goal Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "ORDER",
                                "Order",
                                0,
                                -1,
                                (
                                    ("ORC", "Common Order", 1, 1),
                                    (
                                        "ORDER_DETAIL",
                                        "Order Detail",
                                        0,
                                        1,
                                        (
                                            (
                                                "CHOICE",
                                                "Choice",
                                                1,
                                                1,
                                                (
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "ANYHL7SEGMENT",
                                                        "Any HL7 Segment",
                                                        1,
                                                        1,
                                                    ),
                                                ),
                                                (
                                                    (
                                                        "OBR",
                                                        "Observation Request",
                                                        1,
                                                        1,
                                                    ),
                                                    (
                                                        "ANYHL7SEGMENT",
                                                        "Any HL7 Segment",
                                                        1,
                                                        1,
                                                    ),
                                                ),
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                            (
                                                "ORDER_OBSERVATION",
                                                "Order Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                    ("VAR", "Variance", 0, -1),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "PTR_PCF": (
        "PTR_PCF",
        "PC/pathway (problem-oriented) query response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                        ),
                    ),
                    (
                        "PATHWAY",
                        "Pathway",
                        1,
                        -1,
                        (
                            ("PTH", "Pathway", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("VAR", "Variance", 0, -1),
                            (
                                "PATHWAY_ROLE",
                                "Pathway Role",
                                0,
                                -1,
                                (("ROL", "Role", 1, 1), ("VAR", "Variance", 0, -1)),
                            ),
                            (
                                "PROBLEM",
                                "Problem",
                                0,
                                -1,
                                (
                                    ("PRB", "Problem Details", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("VAR", "Variance", 0, -1),
                                    (
                                        "PROBLEM_ROLE",
                                        "Problem Role",
                                        0,
                                        -1,
                                        (
                                            ("ROL", "Role", 1, 1),
                                            ("VAR", "Variance", 0, -1),
                                        ),
                                    ),
                                    (
                                        "PROBLEM_OBSERVATION",
                                        "Problem Observation",
                                        0,
                                        -1,
                                        (
                                            ("OBX", "Observation/Result", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                    (
                                        "GOAL",
                                        "Goal",
                                        0,
                                        -1,
                                        (
                                            ("GOL", "Goal Detail", 1, 1),
                                            ("NTE", "Notes and Comments", 0, -1),
                                            ("VAR", "Variance", 0, -1),
                                            (
                                                "GOAL_ROLE",
                                                "Goal Role",
                                                0,
                                                -1,
                                                (
                                                    ("ROL", "Role", 1, 1),
                                                    ("VAR", "Variance", 0, -1),
                                                ),
                                            ),
                                            (
                                                "GOAL_OBSERVATION",
                                                "Goal Observation",
                                                0,
                                                -1,
                                                (
                                                    ("OBX", "Observation/Result", 1, 1),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                    (
                                        "ORDER",
                                        "Order",
                                        0,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 1, 1),
                                            (
                                                "ORDER_DETAIL",
                                                "Order Detail",
                                                0,
                                                1,
                                                (
                                                    (
                                                        "CHOICE",
                                                        "Choice",
                                                        1,
                                                        1,
                                                        (
                                                            (
                                                                "OBR",
                                                                "Observation Request",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "ANYHL7SEGMENT",
                                                                "Any HL7 Segment",
                                                                1,
                                                                1,
                                                            ),
                                                        ),
                                                        (
                                                            (
                                                                "OBR",
                                                                "Observation Request",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "ANYHL7SEGMENT",
                                                                "Any HL7 Segment",
                                                                1,
                                                                1,
                                                            ),
                                                        ),
                                                    ),
                                                    (
                                                        "NTE",
                                                        "Notes and Comments",
                                                        0,
                                                        -1,
                                                    ),
                                                    ("VAR", "Variance", 0, -1),
                                                    (
                                                        "ORDER_OBSERVATION",
                                                        "Order Observation",
                                                        0,
                                                        -1,
                                                        (
                                                            (
                                                                "OBX",
                                                                "Observation/Result",
                                                                1,
                                                                1,
                                                            ),
                                                            (
                                                                "NTE",
                                                                "Notes and Comments",
                                                                0,
                                                                -1,
                                                            ),
                                                            ("VAR", "Variance", 0, -1),
                                                        ),
                                                    ),
                                                ),
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "QBP_E03": (
        "QBP_E03",
        "Health care services invoice status",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "QUERY_INFORMATION",
                "Query Information",
                1,
                1,
                (
                    ("QPD", "Query Parameter Definition", 1, 1),
                    ("RCP", "Response Control Parameter", 1, 1),
                ),
                (
                    ("QPD", "Query Parameter Definition", 1, 1),
                    ("RCP", "Response Control Parameter", 1, 1),
                ),
            ),
        ),
    ),
    "QBP_E22": (
        "QBP_E22",
        "Authorization request status",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            (
                "QUERY",
                "Query",
                1,
                1,
                (
                    ("QPD", "Query Parameter Definition", 1, 1),
                    ("RCP", "Response Control Parameter", 1, 1),
                ),
                (
                    ("QPD", "Query Parameter Definition", 1, 1),
                    ("RCP", "Response Control Parameter", 1, 1),
                ),
            ),
        ),
    ),
    "QBP_Q11": (
        "QBP_Q11",
        "Query by parameter requesting an RSP segment pattern response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QBP_Q13": (
        "QBP_Q13",
        "Query by parameter requesting an RTB tabular response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RDF", "Table Row Definition", 0, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QBP_Q15": (
        "QBP_Q15",
        "Query by parameter requesting an RDY display response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QBP_Q21": (
        "QBP_Q21",
        "Get person demographics",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QBP_Qnn": (
        "QBP_Qnn",
        "Query by parameter",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RDF", "Table Row Definition", 0, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QBP_Z73": (
        "QBP_Z73",
        "Query by parameter",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
        ),
    ),
    "QCN_J01": (
        "QCN_J01",
        "Cancel query/acknowledge message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QID", "Query Identification", 1, 1),
        ),
    ),
    "QRY_PC4": (
        "QRY_PC4",
        "PC/problem query",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "QSB_Q16": (
        "QSB_Q16",
        "Create subscription",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QVR_Q17": (
        "QVR_Q17",
        "Query for previous events",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("QBP", "Qbp", 0, 1, (("ANYHL7SEGMENT", "Any HL7 Segment", 0, 1),)),
            ("RCP", "Response Control Parameter", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RAS_O17": (
        "RAS_O17",
        "Pharmacy/treatment administration",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "ADDITIONAL_DEMOGRAPHICS",
                        "Additional Demographics",
                        0,
                        1,
                        (
                            ("PD1", "Patient Additional Demographic", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            (
                                "ORDER_DETAIL_SUPPLEMENT",
                                "Order Detail Supplement",
                                0,
                                1,
                                (
                                    ("NTE", "Notes and Comments", 1, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENTS",
                                        "Components",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "TIMING_ENCODED",
                                "Timing Encoded",
                                1,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                    (
                        "ADMINISTRATION",
                        "Administration",
                        1,
                        -1,
                        (
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                            ("PRT", "Participation Information", 0, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, 1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
        ),
    ),
    "RCI_I05": (
        "RCI_I05",
        "Request for patient clinical information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, -1),
            ("AL1", "Patient Allergy Information", 0, -1),
            (
                "OBSERVATION",
                "Observation",
                0,
                1,
                (
                    ("OBR", "Observation Request", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "RESULTS",
                        "Results",
                        0,
                        1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RCL_I06": (
        "RCL_I06",
        "Request/receipt of clinical data listing",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("DG1", "Diagnosis", 0, -1),
            ("DRG", "Diagnosis Related Group", 0, -1),
            ("AL1", "Patient Allergy Information", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            ("DSP", "Display Data", 0, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RDE_O11": ("RDE_O11", "Pharmacy/treatment encoded order", _RDE_O11),
    "RDE_O25": ("RDE_O11", "Pharmacy/treatment refill authorization request", _RDE_O11),
    "RDR_RDR": (
        "RDR_RDR",
        "Pharmacy/treatment dispense information",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, 1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "DEFINITION",
                "Definition",
                1,
                -1,
                (
                    ("QRD", "Original-Style Query Definition", 1, 1),
                    ("QRF", "Original Style Query Filter", 0, 1),
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ENCODING",
                                "Encoding",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    (
                                        "TIMING_ENCODED",
                                        "Timing Encoded",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "DISPENSE",
                                "Dispense",
                                1,
                                -1,
                                (
                                    ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RDS_O13": (
        "RDS_O13",
        "Pharmacy/treatment dispense",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    (
                        "ADDITIONAL_DEMOGRAPHICS",
                        "Additional Demographics",
                        0,
                        1,
                        (
                            ("PD1", "Patient Additional Demographic", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            (
                                "ORDER_DETAIL_SUPPLEMENT",
                                "Order Detail Supplement",
                                0,
                                1,
                                (
                                    ("NTE", "Notes and Comments", 1, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENT",
                                        "Component",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "TIMING_ENCODED",
                                "Timing Encoded",
                                1,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                    ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                    ("PRT", "Participation Information", 0, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                    ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    ("FT1", "Financial Transaction", 0, -1),
                ),
            ),
        ),
    ),
    "RDY_K15": (
        "RDY_K15",
        "Display response in response to QBP^Q15",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("DSP", "Display Data", 0, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "REF_I12": ("REF_I12", "Patient referral", _REF_I12),
    "REF_I13": ("REF_I12", "Modify patient referral", _REF_I12),
    "REF_I14": ("REF_I12", "Cancel patient referral", _REF_I12),
    "REF_I15": ("REF_I12", "Request patient referral status", _REF_I12),
    "RGV_O15": (
        "RGV_O15",
        "Pharmacy/treatment give",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    ("AL1", "Patient Allergy Information", 0, -1),
                    (
                        "PATIENT_VISIT",
                        "Patient Visit",
                        0,
                        1,
                        (
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            (
                                "ORDER_DETAIL_SUPPLEMENT",
                                "Order Detail Supplement",
                                0,
                                1,
                                (
                                    ("NTE", "Notes and Comments", 1, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENTS",
                                        "Components",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    ("PRT", "Participation Information", 0, -1),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "TIMING_ENCODED",
                                "Timing Encoded",
                                1,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                    (
                        "GIVE",
                        "Give",
                        1,
                        -1,
                        (
                            ("RXG", "Pharmacy/Treatment Give", 1, 1),
                            (
                                "TIMING_GIVE",
                                "Timing Give",
                                1,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RPA_I08": ("RPA_I08", "Request for treatment authorization information", _RPA_I08),
    "RPA_I09": ("RPA_I08", "Request for modification to an authorization", _RPA_I08),
    "RPA_I10": ("RPA_I08", "Request for resubmission of an authorization", _RPA_I08),
    "RPA_I11": ("RPA_I08", "Request for cancellation of an authorization", _RPA_I08),
    "RPI_I01": (
        "RPI_I01",
        "Request for insurance information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "GUARANTOR_INSURANCE",
                "Guarantor Insurance",
                0,
                1,
                (
                    ("GT1", "Guarantor", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        1,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                ),
            ),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RPI_I04": (
        "RPI_I04",
        "Request for patient demographic data",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "GUARANTOR_INSURANCE",
                "Guarantor Insurance",
                0,
                1,
                (
                    ("GT1", "Guarantor", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        1,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance Additional Information", 0, 1),
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                ),
            ),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RPL_I02": (
        "RPL_I02",
        "Request/receipt of patient selection display list",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("NTE", "Notes and Comments", 0, -1),
            ("DSP", "Display Data", 0, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RPR_I03": (
        "RPR_I03",
        "Request/receipt of patient selection list",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RQA_I08": ("RQA_I08", "Request for treatment authorization information", _RQA_I08),
    "RQA_I09": ("RQA_I08", "Request for modification to an authorization", _RQA_I08),
    "RQA_I10": ("RQA_I08", "Request for resubmission of an authorization", _RQA_I08),
    "RQA_I11": ("RQA_I08", "Request for cancellation of an authorization", _RQA_I08),
    "RQC_I05": (
        "RQC_I05",
        "Request for patient clinical information",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RQI_I01": ("RQI_I01", "Request for insurance information", _RQI_I01),
    "RQI_I02": (
        "RQI_I01",
        "Request/receipt of patient selection display list",
        _RQI_I01,
    ),
    "RQI_I03": ("RQI_I01", "Request/receipt of patient selection list", _RQI_I01),
    "RQP_I04": (
        "RQP_I04",
        "Request for patient demographic data",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "PROVIDER",
                "Provider",
                1,
                -1,
                (("PRD", "Provider Data", 1, 1), ("CTD", "Contact Data", 0, -1)),
            ),
            ("PID", "Patient Identification", 1, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RRA_O18": (
        "RRA_O18",
        "Pharmacy/treatment administration acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ADMINISTRATION",
                                "Administration",
                                0,
                                1,
                                (
                                    (
                                        "TREATMENT",
                                        "Treatment",
                                        1,
                                        -1,
                                        (
                                            (
                                                "RXA",
                                                "Pharmacy/Treatment Administration",
                                                1,
                                                1,
                                            ),
                                            ("PRT", "Participation Information", 0, -1),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, 1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRD_O14": (
        "RRD_O14",
        "Pharmacy/treatment dispense acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "DISPENSE",
                                "Dispense",
                                0,
                                1,
                                (
                                    ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("PRT", "Participation Information", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRE_O12": ("RRE_O12", "Pharmacy/treatment encoded order acknowledgment", _RRE_O12),
    "RRE_O26": (
        "RRE_O12",
        "Pharmacy/treatment refill authorization acknowledgment",
        _RRE_O12,
    ),
    "RRG_O16": (
        "RRG_O16",
        "Pharmacy/treatment give acknowledgment",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "RESPONSE",
                "Response",
                0,
                1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "GIVE",
                                "Give",
                                0,
                                1,
                                (
                                    ("RXG", "Pharmacy/Treatment Give", 1, 1),
                                    (
                                        "TIMING_GIVE",
                                        "Timing Give",
                                        1,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRI_I12": ("RRI_I12", "Patient referral", _RRI_I12),
    "RRI_I13": ("RRI_I12", "Modify patient referral", _RRI_I12),
    "RRI_I14": ("RRI_I12", "Cancel patient referral", _RRI_I12),
    "RRI_I15": ("RRI_I12", "Request patient referral status", _RRI_I12),
    "RSP_E03": (
        "RSP_E03",
        "Health care services invoice status",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            (
                "QUERY_ACK",
                "Query Ack",
                1,
                1,
                (
                    ("QAK", "Query Acknowledgment", 1, 1),
                    ("QPD", "Query Parameter Definition", 1, 1),
                    (
                        "INVOICE_PROCESSING_RESULTS_INFO",
                        "Invoice Processing Results Info",
                        0,
                        -1,
                        (("IPR", "Invoice Processing Results", 1, 1),),
                    ),
                ),
                (
                    ("QAK", "Query Acknowledgment", 1, 1),
                    ("QPD", "Query Parameter Definition", 1, 1),
                    (
                        "INVOICE_PROCESSING_RESULTS_INFO",
                        "Invoice Processing Results Info",
                        0,
                        -1,
                    ),
                ),
            ),
        ),
    ),
    "RSP_E22": (
        "RSP_E22",
        "Authorization request status",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            (
                "QUERY_ACK",
                "Query Ack",
                1,
                1,
                (
                    ("QAK", "Query Acknowledgment", 1, 1),
                    ("QPD", "Query Parameter Definition", 1, 1),
                    (
                        "AUTHORIZATION_INFO",
                        "Authorization Info",
                        0,
                        1,
                        (
                            ("IVC", "Invoice Segment", 1, 1),
                            ("PSG", "Product/Service Group", 1, 1),
                            (
                                "PSL_ITEM_INFO",
                                "Psl Item Info",
                                1,
                                -1,
                                (("PSL", "Product/Service Line Item", 1, 1),),
                            ),
                        ),
                    ),
                ),
                (
                    ("QAK", "Query Acknowledgment", 1, 1),
                    ("QPD", "Query Parameter Definition", 1, 1),
                    ("AUTHORIZATION_INFO", "Authorization Info", 0, 1),
                ),
            ),
        ),
    ),
    "RSP_K11": (
        "RSP_K11",
        "Segment pattern response in response to QBP^Q11",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "ROW_DEFINITION",
                "Row Definition",
                0,
                1,
                (("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K21": (
        "RSP_K21",
        "Get person demographics response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                0,
                1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("ARV", "Access Restriction", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    ("QRI", "Query Response Instance", 1, 1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K22": (
        "RSP_K22",
        "Find candidates response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    ("QRI", "Query Response Instance", 0, 1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K23": (
        "RSP_K23",
        "Get corresponding identifiers response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                0,
                1,
                (("PID", "Patient Identification", 1, 1),),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K25": (
        "RSP_K25",
        "Personnel information by segment response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            (
                "STAFF",
                "Staff",
                1,
                -1,
                (
                    ("STF", "Staff Identification", 1, 1),
                    ("PRA", "Practitioner Detail", 0, -1),
                    ("ORG", "Practitioner Organization Unit", 0, -1),
                    ("AFF", "Professional Affiliation", 0, -1),
                    ("LAN", "Language Detail", 0, -1),
                    ("EDU", "Educational Detail", 0, -1),
                    ("CER", "Certificate Detail", 0, -1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    ("ROL", "Role", 0, -1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K31": (
        "RSP_K31",
        "Dispense history response",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            (
                "RESPONSE",
                "Response",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            (
                                "ADDITIONAL_DEMOGRAPHICS",
                                "Additional Demographics",
                                0,
                                1,
                                (
                                    ("PD1", "Patient Additional Demographic", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("AL1", "Patient Allergy Information", 0, -1),
                            (
                                "PATIENT_VISIT",
                                "Patient Visit",
                                0,
                                1,
                                (
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                    ("PRT", "Participation Information", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENTS",
                                        "Components",
                                        0,
                                        -1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "ENCODING",
                                "Encoding",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    (
                                        "TIMING_ENCODED",
                                        "Timing Encoded",
                                        1,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                            ("PRT", "Participation Information", 0, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                0,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 1, 1),
                                    ("PRT", "Participation Information", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_K32": (
        "RSP_K32",
        "Find candidates including visit information response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("QRI", "Query Response Instance", 0, 1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_Z82": (
        "RSP_Z82",
        "Segment pattern response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "VISIT",
                                "Visit",
                                0,
                                1,
                                (
                                    ("AL1", "Patient Allergy Information", 1, -1),
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "COMMON_ORDER",
                        "Common Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "TREATMENT",
                                        "Treatment",
                                        0,
                                        1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                -1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "ENCODED_ORDER",
                                "Encoded Order",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    (
                                        "TIMING_ENCODED",
                                        "Timing Encoded",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_Z86": (
        "RSP_Z86",
        "Segment pattern response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("AL1", "Patient Allergy Information", 0, -1),
                        ),
                    ),
                    (
                        "COMMON_ORDER",
                        "Common Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "ENCODED_ORDER",
                                "Encoded Order",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    (
                                        "TIMING_ENCODED",
                                        "Timing Encoded",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "DISPENSE",
                                "Dispense",
                                0,
                                1,
                                (
                                    ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "GIVE",
                                "Give",
                                0,
                                1,
                                (
                                    ("RXG", "Pharmacy/Treatment Give", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "ADMINISTRATION",
                                "Administration",
                                0,
                                1,
                                (
                                    ("RXA", "Pharmacy/Treatment Administration", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RSP_Z88": (
        "RSP_Z88",
        "Segment pattern response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "ALLERGY",
                                "Allergy",
                                0,
                                1,
                                (
                                    ("AL1", "Patient Allergy Information", 1, -1),
                                    (
                                        "VISIT",
                                        "Visit",
                                        0,
                                        1,
                                        (
                                            ("PV1", "Patient Visit", 1, 1),
                                            (
                                                "PV2",
                                                "Patient Visit - Additional Information",
                                                0,
                                                1,
                                            ),
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "COMMON_ORDER",
                        "Common Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "COMPONENT",
                                        "Component",
                                        0,
                                        1,
                                        (
                                            (
                                                "RXC",
                                                "Pharmacy/Treatment Component Order",
                                                1,
                                                -1,
                                            ),
                                            ("NTE", "Notes and Comments", 0, -1),
                                        ),
                                    ),
                                ),
                            ),
                            (
                                "ORDER_ENCODED",
                                "Order Encoded",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    (
                                        "TIMING_ENCODED",
                                        "Timing Encoded",
                                        0,
                                        -1,
                                        (
                                            ("TQ1", "Timing/Quantity", 1, 1),
                                            (
                                                "TQ2",
                                                "Timing/Quantity Relationship",
                                                0,
                                                -1,
                                            ),
                                        ),
                                    ),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("RXD", "Pharmacy/Treatment Dispense", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 1, 1),
        ),
    ),
    "RSP_Z90": (
        "RSP_Z90",
        "Segment pattern response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("RCP", "Response Control Parameter", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PD1", "Patient Additional Demographic", 0, 1),
                            ("NK1", "Next of Kin / Associated Parties", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                            (
                                "VISIT",
                                "Visit",
                                0,
                                1,
                                (
                                    ("PV1", "Patient Visit", 1, 1),
                                    (
                                        "PV2",
                                        "Patient Visit - Additional Information",
                                        0,
                                        1,
                                    ),
                                ),
                            ),
                        ),
                    ),
                    (
                        "COMMON_ORDER",
                        "Common Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 1, 1),
                            (
                                "TIMING",
                                "Timing",
                                0,
                                -1,
                                (
                                    ("TQ1", "Timing/Quantity", 1, 1),
                                    ("TQ2", "Timing/Quantity Relationship", 0, -1),
                                ),
                            ),
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("CTD", "Contact Data", 0, 1),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation/Result", 0, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                    (
                        "SPECIMEN",
                        "Specimen",
                        0,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 1, 1),
        ),
    ),
    "RTB_K13": (
        "RTB_K13",
        "Tabular response in response to QBP^Q13",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "ROW_DEFINITION",
                "Row Definition",
                0,
                1,
                (
                    ("RDF", "Table Row Definition", 1, 1),
                    ("RDT", "Table Row Data", 0, -1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RTB_Knn": (
        "RTB_Knn",
        "Tabular response",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RTB_Z74": (
        "RTB_Z74",
        "Tabular response",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, -1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("QPD", "Query Parameter Definition", 1, 1),
            (
                "ROW_DEFINITION",
                "Row Definition",
                0,
                1,
                (
                    ("RDF", "Table Row Definition", 1, 1),
                    ("RDT", "Table Row Data", 0, -1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "SDR_S31": (
        "SDR_S31",
        "Request anti-microbial device data",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "ANTI_MICROBIAL_DEVICE_DATA",
                "Anti Microbial Device Data",
                1,
                1,
                (
                    ("SDD", "Sterilization Device Data", 1, 1),
                    ("SCD", "Anti-Microbial Cycle Data", 0, -1),
                ),
                (
                    ("SDD", "Sterilization Device Data", 1, 1),
                    ("SCD", "Anti-Microbial Cycle Data", 0, -1),
                ),
            ),
        ),
    ),
    "SDR_S32": (
        "SDR_S32",
        "Request anti-microbial device cycle data",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            (
                "ANTI_MICROBIAL_DEVICE_CYCLE_DATA",
                "Anti Microbial Device Cycle Data",
                1,
                1,
                (
                    ("SDD", "Sterilization Device Data", 1, 1),
                    ("SCD", "Anti-Microbial Cycle Data", 0, -1),
                ),
                (
                    ("SDD", "Sterilization Device Data", 1, 1),
                    ("SCD", "Anti-Microbial Cycle Data", 0, -1),
                ),
            ),
        ),
    ),
    "SIU_S12": (
        "SIU_S12",
        "Notification of new appointment booking",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S13": (
        "SIU_S13",
        "Notification of appointment rescheduling",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S14": (
        "SIU_S14",
        "Notification of appointment modification",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S15": (
        "SIU_S15",
        "Notification of appointment cancellation",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S16": (
        "SIU_S16",
        "Notification of appointment discontinuation",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S17": (
        "SIU_S17",
        "Notification of appointment deletion",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S18": (
        "SIU_S18",
        "Notification of addition of service/resource on appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S19": (
        "SIU_S19",
        "Notification of modification of service/resource on appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S20": (
        "SIU_S20",
        "Notification of cancellation of service/resource on appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S21": (
        "SIU_S21",
        "Notification of discontinuation of service/resource on appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S22": (
        "SIU_S22",
        "Notification of deletion of service/resource on appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S23": (
        "SIU_S23",
        "Notification of blocked schedule time slot(s)",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S24": (
        "SIU_S24",
        "Notification of opened (\"unblocked\") schedule time slot(s)",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S26": (
        "SIU_S26",
        "Notification that patient did not show up for scheduled appointment",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SIU_S27": (
        "SIU_S27",
        "Broadcast notification of scheduled appointments",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
            ("TQ1", "Timing/Quantity", 0, -1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                ),
            ),
            (
                "RESOURCES",
                "Resources",
                1,
                -1,
                (
                    ("RGS", "Resource Group", 1, 1),
                    (
                        "SERVICE",
                        "Service",
                        0,
                        -1,
                        (
                            ("AIS", "Appointment Information", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "GENERAL_RESOURCE",
                        "General Resource",
                        0,
                        -1,
                        (
                            ("AIG", "Appointment Information - General Resource", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "LOCATION_RESOURCE",
                        "Location Resource",
                        0,
                        -1,
                        (
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "PERSONNEL_RESOURCE",
                        "Personnel Resource",
                        0,
                        -1,
                        (
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SLR_S28": (
        "SLR_S28",
        "Request new sterilization lot",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("SLT", "Sterilization Lot", 1, -1),
        ),
    ),
    "SRM_S01": ("SRM_S01", "Request new appointment booking", _SRM_S01),
    "SRM_S02": ("SRM_S01", "Request appointment rescheduling", _SRM_S01),
    "SRM_S03": ("SRM_S01", "Request appointment modification", _SRM_S01),
    "SRM_S04": ("SRM_S01", "Request appointment cancellation", _SRM_S01),
    "SRM_S05": ("SRM_S01", "Request appointment discontinuation", _SRM_S01),
    "SRM_S06": ("SRM_S01", "Request appointment deletion", _SRM_S01),
    "SRM_S07": (
        "SRM_S01",
        "Request addition of service/resource on appointment",
        _SRM_S01,
    ),
    "SRM_S08": (
        "SRM_S01",
        "Request modification of service/resource on appointment",
        _SRM_S01,
    ),
    "SRM_S09": (
        "SRM_S01",
        "Request cancellation of service/resource on appointment",
        _SRM_S01,
    ),
    "SRM_S10": (
        "SRM_S01",
        "Request discontinuation of service/resource on appointment",
        _SRM_S01,
    ),
    "SRM_S11": (
        "SRM_S01",
        "Request deletion of service/resource on appointment",
        _SRM_S01,
    ),
    "SRR_S01": ("SRR_S01", "Request new appointment booking", _SRR_S01),
    "SRR_S02": ("SRR_S01", "Request appointment rescheduling", _SRR_S01),
    "SRR_S03": ("SRR_S01", "Request appointment modification", _SRR_S01),
    "SRR_S04": ("SRR_S01", "Request appointment cancellation", _SRR_S01),
    "SRR_S05": ("SRR_S01", "Request appointment discontinuation", _SRR_S01),
    "SRR_S06": ("SRR_S01", "Request appointment deletion", _SRR_S01),
    "SRR_S07": (
        "SRR_S01",
        "Request addition of service/resource on appointment",
        _SRR_S01,
    ),
    "SRR_S08": (
        "SRR_S01",
        "Request modification of service/resource on appointment",
        _SRR_S01,
    ),
    "SRR_S09": (
        "SRR_S01",
        "Request cancellation of service/resource on appointment",
        _SRR_S01,
    ),
    "SRR_S10": (
        "SRR_S01",
        "Request discontinuation of service/resource on appointment",
        _SRR_S01,
    ),
    "SRR_S11": (
        "SRR_S01",
        "Request deletion of service/resource on appointment",
        _SRR_S01,
    ),
    "SSR_U04": (
        "SSR_U04",
        "Specimen status request",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "SPECIMEN_CONTAINER",
                "Specimen Container",
                1,
                -1,
                (
                    ("SAC", "Specimen Container Detail", 1, 1),
                    ("SPM", "Specimen", 0, -1),
                ),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "SSU_U03": (
        "SSU_U03",
        "Specimen status update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "SPECIMEN_CONTAINER",
                "Specimen Container",
                1,
                -1,
                (
                    ("SAC", "Specimen Container Detail", 1, 1),
                    ("OBX", "Observation/Result", 0, -1),
                    (
                        "SPECIMEN",
                        "Specimen",
                        0,
                        -1,
                        (
                            ("SPM", "Specimen", 1, 1),
                            ("OBX", "Observation/Result", 0, -1),
                        ),
                    ),
                ),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "STC_S33": (
        "STC_S33",
        "Notification of sterilization configuration",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("SCP", "Sterilizer Configuration (Anti-Microbial Devices)", 1, -1),
        ),
    ),
    "TCU_U10": (
        "TCU_U10",
        "Automated equipment test code settings update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("EQU", "Equipment Detail", 1, 1),
            (
                "TEST_CONFIGURATION",
                "Test Configuration",
                1,
                -1,
                (("SPM", "Specimen", 0, 1), ("TCC", "Test Code Configuration", 1, -1)),
            ),
            ("ROL", "Role", 0, 1),
        ),
    ),
    "UDM_Q05": (
        "UDM_Q05",
        "Unsolicited display update message",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("URD", "Results/Update Definition", 1, 1),
            ("URS", "Unsolicited Selection", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "VXU_V04": (
        "VXU_V04",
        "Unsolicited vaccination record update",
        (
            ("MSH", "Message Header", 1, 1),
            ("SFT", "Software Segment", 0, -1),
            ("UAC", "User Authentication Credential Segment", 0, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
                ),
            ),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance Additional Information", 0, 1),
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "ORDER",
                "Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 1, 1),
                    (
                        "TIMING",
                        "Timing",
                        0,
                        -1,
                        (
                            ("TQ1", "Timing/Quantity", 1, 1),
                            ("TQ2", "Timing/Quantity Relationship", 0, -1),
                        ),
                    ),
                    ("RXA", "Pharmacy/Treatment Administration", 1, 1),
                    ("RXR", "Pharmacy/Treatment Route", 0, 1),
                    (
                        "OBSERVATION",
                        "Observation",
                        0,
                        -1,
                        (
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
}
