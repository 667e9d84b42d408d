# src/hl7_definitions/data/v2_3/messages.py
"""HL7 v2.3 message structures."""

_ADT_A01 = (
    ("MSH", "Message Header", 1, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
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
            ("IN3", "Insurance Additional Information, Certification", 0, 1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("UB1", "UB82", 0, 1),
    ("UB2", "UB92 Data", 0, 1),
)

_ADT_A06 = (
    ("MSH", "Message Header", 1, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("MRG", "Merge Patient Information", 0, 1),
    ("NK1", "Next of Kin / Associated Parties", 0, -1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("DB1", "Disability", 0, -1),
    ("DRG", "Diagnosis Related Group", 0, 1),
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
            ("IN3", "Insurance Additional Information, Certification", 0, 1),
        ),
    ),
    ("ACC", "Accident", 0, 1),
    ("UB1", "UB82", 0, 1),
    ("UB2", "UB92 Data", 0, 1),
)

_ADT_A09 = (
    ("MSH", "Message Header", 1, 1),
    ("EVN", "Event Type", 1, 1),
    ("PID", "Patient Identification", 1, 1),
    ("PD1", "Patient Additional Demographic", 0, 1),
    ("PV1", "Patient Visit", 1, 1),
    ("PV2", "Patient Visit - Additional Information", 0, 1),
    ("DB1", "Disability", 0, -1),
    ("OBX", "Observation/Result", 0, -1),
    ("DG1", "Diagnosis", 0, -1),
)

MESSAGES = {
    "ACK": (
        "ACK",
        "General acknowledgment message",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
        ),
    ),
    "ADT_A01": ("ADT_A01", "Admit/visit notification", _ADT_A01),
    "ADT_A02": (
        "ADT_A02",
        "Transfer a patient",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
        ),
    ),
    "ADT_A03": (
        "ADT_A03",
        "Discharge/end visit",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
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
        ),
    ),
    "ADT_A04": ("ADT_A01", "Register a patient", _ADT_A01),
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
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A13": ("ADT_A01", "Cancel discharge/end visit", _ADT_A01),
    "ADT_A16": (
        "ADT_A16",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
            ("DG1", "Diagnosis", 0, 1),
            ("DRG", "Diagnosis Related Group", 0, 1),
        ),
    ),
    "ADT_A17": (
        "ADT_A17",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
    "ADT_A18": (
        "ADT_A18",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("MRG", "Merge Patient Information", 0, 1),
            ("PV1", "Patient Visit", 1, 1),
        ),
    ),
    "ADT_A20": (
        "ADT_A20",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("NPU", "Bed Status Update", 1, 1),
        ),
    ),
    "ADT_A24": (
        "ADT_A24",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
    "ADT_A30": (
        "ADT_A30",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("MRG", "Merge Patient Information", 1, 1),
        ),
    ),
    "ADT_A38": (
        "ADT_A38",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
    "ADT_A39": (
        "ADT_A39",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
        ),
    ),
    "ADT_A43": (
        "ADT_A43",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
    "ADT_A45": (
        "ADT_A45",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
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
    "ADT_A50": (
        "ADT_A50",
        "ADT message",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("MRG", "Merge Patient Information", 1, 1),
            ("PV1", "Patient Visit", 1, 1),
        ),
    ),
    "ARD_A19": (
        "ARD_A19",
        "ARD_A19",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    ("EVN", "Event Type", 0, 1),
                    ("PID", "Patient Identification", 1, 1),
                    ("PD1", "Patient Additional Demographic", 0, 1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                    ("PV1", "Patient Visit", 1, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
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
                            (
                                "IN3",
                                "Insurance Additional Information, Certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82", 0, 1),
                    ("UB2", "UB92 Data", 0, 1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "BAR_P01": (
        "BAR_P01",
        "Add/change billing account",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            (
                "VISIT",
                "Visit",
                1,
                -1,
                (
                    ("PV1", "Patient Visit", 0, 1),
                    ("PV2", "Patient Visit - Additional Information", 0, 1),
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
                                1,
                            ),
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
        "Add/change billing account",
        (
            ("MSH", "Message Header", 1, 1),
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
    "BAR_P06": (
        "BAR_P06",
        "Add/change billing account",
        (
            ("MSH", "Message Header", 1, 1),
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
    "CRM_C01": (
        "CRM_C01",
        "CRM_C01",
        (
            ("MSH", "Message Header", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("PV1", "Patient Visit", 0, 1),
                    ("CSR", "Clinical Study Registration", 1, 1),
                    ("CSP", "Clinical Study Phase", 0, -1),
                ),
            ),
        ),
    ),
    "CSU_C09": (
        "CSU_C09",
        "CSU_C09",
        (
            ("MSH", "Message Header", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
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
                            ("PV1", "Patient Visit", 1, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
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
                                    (
                                        "CSS",
                                        "Clinical Study Data Schedule Segment",
                                        0,
                                        1,
                                    ),
                                    (
                                        "STUDY_OBSERVATION",
                                        "Study Observation",
                                        0,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 0, 1),
                                            ("OBR", "Observation Request", 1, 1),
                                            ("OBX", "Observation/Result", 1, -1),
                                        ),
                                    ),
                                    (
                                        "STUDY_PHARM",
                                        "Study Pharm",
                                        1,
                                        -1,
                                        (
                                            ("ORC", "Common Order", 0, 1),
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
                                                    (
                                                        "RXR",
                                                        "Pharmacy/Treatment Route",
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
    "DFT_P03": (
        "DFT_P03",
        "Detail financial transactions",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("PV1", "Patient Visit", 0, 1),
            ("PV2", "Patient Visit - Additional Information", 0, 1),
            ("DB1", "Disability", 0, -1),
            ("OBX", "Observation/Result", 0, -1),
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
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
        ),
    ),
    "DOC_T12": (
        "DOC_T12",
        "DOC_T12",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "RESULT",
                "Result",
                1,
                -1,
                (
                    ("EVN", "Event Type", 0, 1),
                    ("PID", "Patient Identification", 1, 1),
                    ("PV1", "Patient Visit", 1, 1),
                    ("TXA", "Transcription Document Header", 1, 1),
                    ("OBX", "Observation/Result", 0, -1),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "DSR_Q01": (
        "DSR_Q01",
        "DSR_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "DSR_Q03": (
        "DSR_Q03",
        "DSR_Q03",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 0, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "EDR_Q01": (
        "EDR_Q01",
        "EDR_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "EQQ_Q01": (
        "EQQ_Q01",
        "EQQ_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("EQL", "Embedded Query Language", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "ERP_Q01": (
        "ERP_Q01",
        "ERP_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("ERQ", "Event Replay Query", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "MDM_T01": (
        "MDM_T01",
        "Medical document management",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("TXA", "Transcription Document Header", 1, 1),
        ),
    ),
    "MDM_T02": (
        "MDM_T02",
        "Medical document management",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PV1", "Patient Visit", 1, 1),
            ("TXA", "Transcription Document Header", 1, 1),
            ("OBX", "Observation/Result", 1, -1),
        ),
    ),
    "MFK_M01": (
        "MFK_M01",
        "MFK_M01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFK_M02": (
        "MFK_M02",
        "MFK_M02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFN_M01": (
        "MFN_M01",
        "MFN_M01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF", "Mf", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
        ),
    ),
    "MFN_M02": (
        "MFN_M02",
        "MFN_M02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_STAFF",
                "Mf Staff",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("STF", "Staff Identification", 1, 1),
                    ("PRA", "Practitioner Detail", 0, 1),
                ),
            ),
        ),
    ),
    "MFN_M03": (
        "MFN_M03",
        "MFN_M03",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST",
                "Mf Test",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    ("ANYHL7SEGMENT", "Any HL7 Segment", 1, 1),
                ),
            ),
        ),
    ),
    "MFN_M05": (
        "MFN_M05",
        "MFN_M05",
        (
            ("MSH", "Message Header", 1, 1),
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
        "MFN_M06",
        (
            ("MSH", "Message Header", 1, 1),
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
    "MFN_M07": (
        "MFN_M07",
        "MFN_M07",
        (
            ("MSH", "Message Header", 1, 1),
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
    "MFN_M08": (
        "MFN_M08",
        "MFN_M08",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_NUMERIC",
                "Mf Test Numeric",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
                    ("OM1", "General Segment", 1, 1),
                    (
                        "MF_NUMERIC_OBSERVATION",
                        "Mf Numeric Observation",
                        0,
                        1,
                        (
                            ("OM2", "Numeric Observation", 0, 1),
                            ("OM3", "Categorical Service/Test/Observation", 0, 1),
                            ("OM4", "Observations that Require Specimens", 0, 1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "MFN_M09": (
        "MFN_M09",
        "MFN_M09",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_CATEGORICAL",
                "Mf Test Categorical",
                1,
                -1,
                (
                    ("MFE", "Master File Entry", 1, 1),
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
        "MFN_M10",
        (
            ("MSH", "Message Header", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            (
                "MF_TEST_BATTERIES",
                "Mf Test Batteries",
                1,
                -1,
                (
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
        "MFN_M11",
        (
            ("MSH", "Message Header", 1, 1),
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
    "OMD_O01": (
        "OMD_O01",
        "OMD_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                                1,
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
                    ("ODT", "Diet Tray Instructions", 1, -1),
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    "OMN_O01": (
        "OMN_O01",
        "OMN_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
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
                        ),
                    ),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "OMS_O01": (
        "OMS_O01",
        "OMS_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            ("RQD", "Requisition Detail", 1, 1),
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
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "ORD_O02": (
        "ORD_O02",
        "ORD_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                            ("ODT", "Diet Tray Instructions", 0, -1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORF_R04": (
        "ORF_R04",
        "ORF_R04",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
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
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 0, 1),
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
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
                            ("CTI", "Clinical Trial Identification", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "ORM_O01": (
        "ORM_O01",
        "Pharmacy/treatment order message",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                                    ("RQD", "Requisition Detail", 1, 1),
                                    ("RQ1", "Requisition Detail-1", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("ODT", "Diet Tray Instructions", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("RQD", "Requisition Detail", 1, 1),
                                    ("RQ1", "Requisition Detail-1", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("ODT", "Diet Tray Instructions", 1, 1),
                                ),
                            ),
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
                        ),
                    ),
                    ("CTI", "Clinical Trial Identification", 0, 1),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "ORN_O02": (
        "ORN_O02",
        "ORN_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                            ("RQD", "Requisition Detail", 1, 1),
                            ("RQ1", "Requisition Detail-1", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORR_O02": (
        "ORR_O02",
        "ORR_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "CHOICE",
                                "Choice",
                                1,
                                1,
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("RQD", "Requisition Detail", 1, 1),
                                    ("RQ1", "Requisition Detail-1", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("ODT", "Diet Tray Instructions", 1, 1),
                                ),
                                (
                                    ("OBR", "Observation Request", 1, 1),
                                    ("RQD", "Requisition Detail", 1, 1),
                                    ("RQ1", "Requisition Detail-1", 1, 1),
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    (
                                        "ODS",
                                        "Dietary Orders, Supplements, and Preferences",
                                        1,
                                        1,
                                    ),
                                    ("ODT", "Diet Tray Instructions", 1, 1),
                                ),
                            ),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("CTI", "Clinical Trial Identification", 0, -1),
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
                            ("PD1", "Patient Additional Demographic", 0, 1),
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
                        "ORDER_OBSERVATION",
                        "Order Observation",
                        1,
                        -1,
                        (
                            ("ORC", "Common Order", 0, 1),
                            ("OBR", "Observation Request", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
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
                            ("CTI", "Clinical Trial Identification", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "OSQ_Q06": (
        "OSQ_Q06",
        "OSQ_Q06",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "OSR_Q06": (
        "OSR_Q06",
        "OSR_Q06",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
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
                            ("OBR", "Observation Request", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                            ("CTI", "Clinical Trial Identification", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "PEX_P07": (
        "PEX_P07",
        "PEX_P07",
        (
            ("MSH", "Message Header", 1, 1),
            ("EVN", "Event Type", 1, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                                            (
                                                "RXE",
                                                "Pharmacy/Treatment Encoded Order",
                                                1,
                                                1,
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
                                            (
                                                "RXA",
                                                "Pharmacy/Treatment Administration",
                                                1,
                                                1,
                                            ),
                                            ("RXR", "Pharmacy/Treatment Route", 0, 1),
                                        ),
                                    ),
                                    ("PRB", "Problem Details", 0, -1),
                                    ("OBX", "Observation/Result", 0, -1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    (
                                        "ASSOCIATED_PERSON",
                                        "Associated Person",
                                        0,
                                        1,
                                        (
                                            (
                                                "NK1",
                                                "Next of Kin / Associated Parties",
                                                1,
                                                1,
                                            ),
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
                                                    (
                                                        "RXR",
                                                        "Pharmacy/Treatment Route",
                                                        0,
                                                        -1,
                                                    ),
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
                                                    (
                                                        "RXR",
                                                        "Pharmacy/Treatment Route",
                                                        0,
                                                        1,
                                                    ),
                                                ),
                                            ),
                                            ("PRB", "Problem Details", 0, -1),
                                            ("OBX", "Observation/Result", 0, -1),
                                        ),
                                    ),
                                    (
                                        "STUDY",
                                        "Study",
                                        0,
                                        -1,
                                        (
                                            (
                                                "CSR",
                                                "Clinical Study Registration",
                                                1,
                                                1,
                                            ),
                                            ("CSP", "Clinical Study Phase", 0, -1),
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
    "PGL_PC6": (
        "PGL_PC6",
        "PGL_PC6",
        (
            ("MSH", "Message Header", 1, 1),
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
                                    ("OBR", "Observation Request", 1, 1),
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
    "PIN_I07": (
        "PIN_I07",
        "PIN_I07",
        (
            ("MSH", "Message Header", 1, 1),
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
    "PPG_PCG": (
        "PPG_PCG",
        "PPG_PCG",
        (
            ("MSH", "Message Header", 1, 1),
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
                                            ("OBR", "Observation Request", 1, 1),
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
    "PPP_PCB": (
        "PPP_PCB",
        "PPP_PCB",
        (
            ("MSH", "Message Header", 1, 1),
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
                                            ("OBR", "Observation Request", 1, 1),
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
    "PPR_PC1": (
        "PPR_PC1",
        "PPR_PC1",
        (
            ("MSH", "Message Header", 1, 1),
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
                                    ("OBR", "Observation Request", 1, 1),
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
    "PPT_PCL": (
        "PPT_PCL",
        "PPT_PCL",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
        "PPV_PCA",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                            ("OBR", "Observation Request", 1, 1),
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
        "PRR_PC5",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                            ("OBR", "Observation Request", 1, 1),
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
        "PTR_PCF",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
    "QCK_Q02": (
        "QCK_Q02",
        "QCK_Q02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 0, 1),
        ),
    ),
    "QRY_A19": (
        "QRY_A19",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "QRY_PC4": (
        "QRY_PC4",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "QRY_Q01": (
        "QRY_Q01",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QRY_Q02": (
        "QRY_Q02",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "QRY_R02": (
        "QRY_R02",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 1, 1),
        ),
    ),
    "QRY_T12": (
        "QRY_T12",
        "Query, original mode",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "RAR_RAR": (
        "RAR_RAR",
        "RAR_RAR",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "ENCODING",
                                "Encoding",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RAS_O01": (
        "RAS_O01",
        "RAS_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                        ),
                    ),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                    ("RXA", "Pharmacy/Treatment Administration", 1, -1),
                    ("RXR", "Pharmacy/Treatment Route", 1, 1),
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
                    ("CTI", "Clinical Trial Identification", 0, -1),
                ),
            ),
        ),
    ),
    "RCI_I05": (
        "RCI_I05",
        "RCI_I05",
        (
            ("MSH", "Message Header", 1, 1),
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
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RCL_I06": (
        "RCL_I06",
        "RCL_I06",
        (
            ("MSH", "Message Header", 1, 1),
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
    "RDE_O01": (
        "RDE_O01",
        "RDE_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
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
                    ("CTI", "Clinical Trial Identification", 0, 1),
                ),
            ),
        ),
    ),
    "RDO_O01": (
        "RDO_O01",
        "RDO_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "RDR_RDR": (
        "RDR_RDR",
        "RDR_RDR",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "ENCODING",
                                "Encoding",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, 1),
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
    "RDS_O01": (
        "RDS_O01",
        "RDS_O01",
        (
            ("MSH", "Message Header", 1, 1),
            ("NTE", "Notes and Comments", 0, -1),
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
                        ),
                    ),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
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
                            ("OBX", "Observation/Result", 1, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "REF_I12": (
        "REF_I12",
        "REF_I12",
        (
            ("MSH", "Message Header", 1, 1),
            ("RF1", "Referral Information", 0, 1),
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
                0,
                -1,
                (
                    ("PR1", "Procedures", 1, 1),
                    (
                        "AUTCTD_SUPPGRP2",
                        "Autctd SUPPGRP2",
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
                "RESULTS",
                "Results",
                0,
                -1,
                (
                    ("OBR", "Observation Request", 1, 1),
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
        ),
    ),
    "RER_RER": (
        "RER_RER",
        "RER_RER",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RGR_RGR": (
        "RGR_RGR",
        "RGR_RGR",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "ENCODING",
                                "Encoding",
                                0,
                                1,
                                (
                                    ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
                                    ),
                                ),
                            ),
                            ("RXG", "Pharmacy/Treatment Give", 1, -1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RGV_O01": (
        "RGV_O01",
        "RGV_O01",
        (
            ("MSH", "Message Header", 1, 1),
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
                        ),
                    ),
                    (
                        "ENCODING",
                        "Encoding",
                        0,
                        1,
                        (
                            ("RXE", "Pharmacy/Treatment Encoded Order", 1, 1),
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
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
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
        ),
    ),
    "ROR_ROR": (
        "ROR_ROR",
        "ROR_ROR",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                            ("RXO", "Pharmacy/Treatment Order", 1, 1),
                            ("RXR", "Pharmacy/Treatment Route", 1, -1),
                            ("RXC", "Pharmacy/Treatment Component Order", 0, -1),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RPA_I08": (
        "RPA_I08",
        "RPA_I08",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("RF1", "Referral Information", 0, 1),
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
                        "AUTCTD_SUPPGRP2",
                        "Autctd SUPPGRP2",
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
                    ("NTE", "Notes and Comments", 0, -1),
                ),
            ),
        ),
    ),
    "RPI_I01": (
        "RPI_I01",
        "RPI_I01",
        (
            ("MSH", "Message Header", 1, 1),
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
        "RPL_I02",
        (
            ("MSH", "Message Header", 1, 1),
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
    "RQA_I08": (
        "RQA_I08",
        "RQA_I08",
        (
            ("MSH", "Message Header", 1, 1),
            ("RF1", "Referral Information", 0, 1),
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
                        "AUTCTD_SUPPGRP2",
                        "Autctd SUPPGRP2",
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
        ),
    ),
    "RQC_I05": (
        "RQC_I05",
        "RQC_I05",
        (
            ("MSH", "Message Header", 1, 1),
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
    "RQC_I06": (
        "RQC_I06",
        "RQC_I06",
        (
            ("MSH", "Message Header", 1, 1),
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
            ("GT1", "Guarantor", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
        ),
    ),
    "RQI_I01": (
        "RQI_I01",
        "RQI_I01",
        (
            ("MSH", "Message Header", 1, 1),
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
    "RQP_I04": (
        "RQP_I04",
        "RQP_I04",
        (
            ("MSH", "Message Header", 1, 1),
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
    "RQQ_Q01": (
        "RQQ_Q01",
        "RQQ_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("ERQ", "Event Replay Query", 1, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "RRA_O02": (
        "RRA_O02",
        "RRA_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "ADMINISTRATION",
                                "Administration",
                                0,
                                -1,
                                (
                                    ("RXA", "Pharmacy/Treatment Administration", 1, 1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, 1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRD_O02": (
        "RRD_O02",
        "RRD_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("NTE", "Notes and Comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    (
                        "RESPONSE",
                        "Response",
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
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRG_O02": (
        "RRG_O02",
        "RRG_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                        ),
                    ),
                ),
            ),
        ),
    ),
    "RRI_I12": (
        "RRI_I12",
        "RRI_I12",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 0, 1),
            ("RF1", "Referral Information", 0, 1),
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
            (
                "PROVIDER",
                "Provider",
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
                        "AUTCTD_SUPPGRP2",
                        "Autctd SUPPGRP2",
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
                "RESULTS",
                "Results",
                0,
                -1,
                (
                    ("OBR", "Observation Request", 1, 1),
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
        ),
    ),
    "RRO_O02": (
        "RRO_O02",
        "RRO_O02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
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
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("RXO", "Pharmacy/Treatment Order", 1, 1),
                                    ("NTE", "Notes and Comments", 0, -1),
                                    ("RXR", "Pharmacy/Treatment Route", 1, -1),
                                    (
                                        "RXC",
                                        "Pharmacy/Treatment Component Order",
                                        0,
                                        -1,
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
    "SIU_S12": (
        "SIU_S12",
        "Schedule information unsolicited",
        (
            ("MSH", "Message Header", 1, 1),
            ("SCH", "Scheduling Activity Information", 1, 1),
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
    "SPQ_Q01": (
        "SPQ_Q01",
        "SPQ_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("SPR", "Stored Procedure Request Definition", 1, 1),
            ("RDF", "Table Row Definition", 0, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "SQM_S25": (
        "SQM_S25",
        "SQM_S25",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "REQUEST",
                "Request",
                0,
                1,
                (
                    ("ARQ", "Appointment Request", 1, 1),
                    ("APR", "Appointment Preferences", 0, 1),
                    ("PID", "Patient Identification", 0, 1),
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
                                ),
                            ),
                            (
                                "GENERAL_RESOURCE",
                                "General Resource",
                                0,
                                -1,
                                (
                                    (
                                        "AIG",
                                        "Appointment Information - General Resource",
                                        1,
                                        1,
                                    ),
                                    ("APR", "Appointment Preferences", 0, 1),
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
                                    ("APR", "Appointment Preferences", 0, 1),
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
                                    ("APR", "Appointment Preferences", 0, 1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "SQR_S25": (
        "SQR_S25",
        "SQR_S25",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            (
                "SCHEDULE",
                "Schedule",
                0,
                -1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
                    ("NTE", "Notes and Comments", 0, -1),
                    (
                        "PATIENT",
                        "Patient",
                        0,
                        1,
                        (
                            ("PID", "Patient Identification", 1, 1),
                            ("PV1", "Patient Visit", 0, 1),
                            ("PV2", "Patient Visit - Additional Information", 0, 1),
                            ("DG1", "Diagnosis", 0, 1),
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
                                    (
                                        "AIG",
                                        "Appointment Information - General Resource",
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
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "SRM_S01": (
        "SRM_S01",
        "SRM_S01",
        (
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
                            (
                                "AIL",
                                "Appointment Information - Location Resource",
                                1,
                                1,
                            ),
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
                            (
                                "AIP",
                                "Appointment Information - Personnel Resource",
                                1,
                                1,
                            ),
                            ("APR", "Appointment Preferences", 0, 1),
                            ("NTE", "Notes and Comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "SRR_S01": (
        "SRR_S01",
        "SRR_S01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            (
                "SCHEDULE",
                "Schedule",
                0,
                1,
                (
                    ("SCH", "Scheduling Activity Information", 1, 1),
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
                                    (
                                        "AIG",
                                        "Appointment Information - General Resource",
                                        1,
                                        1,
                                    ),
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
        ),
    ),
    "SUR_P09": (
        "SUR_P09",
        "SUR_P09",
        (
            ("MSH", "Message Header", 1, 1),
            (
                "FACILITY",
                "Facility",
                1,
                -1,
                (
                    ("FAC", "Facility", 1, 1),
                    (
                        "PRODUCT",
                        "Product",
                        1,
                        -1,
                        (
                            ("PSH", "Product Summary Header", 1, 1),
                            ("PDC", "Product Detail Country", 1, 1),
                        ),
                    ),
                    ("PSH", "Product Summary Header", 1, 1),
                    (
                        "FACILITY_DETAIL",
                        "Facility Detail",
                        1,
                        -1,
                        (
                            ("FAC", "Facility", 1, 1),
                            ("PDC", "Product Detail Country", 1, 1),
                            ("NTE", "Notes and Comments", 1, 1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "TBR_Q01": (
        "TBR_Q01",
        "TBR_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QAK", "Query Acknowledgment", 1, 1),
            ("RDF", "Table Row Definition", 1, 1),
            ("RDT", "Table Row Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "UDM_Q05": (
        "UDM_Q05",
        "UDM_Q05",
        (
            ("MSH", "Message Header", 1, 1),
            ("URD", "Results/Update Definition", 1, 1),
            ("URS", "Unsolicited Selection", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "VQQ_Q01": (
        "VQQ_Q01",
        "VQQ_Q01",
        (
            ("MSH", "Message Header", 1, 1),
            ("VTQ", "Virtual Table Query Request", 1, 1),
            ("RDF", "Table Row Definition", 0, 1),
            ("DSC", "Continuation Pointer", 0, 1),
        ),
    ),
    "VXQ_V01": (
        "VXQ_V01",
        "VXQ_V01",
        (
            ("MSH", "Message Header", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "VXR_V03": (
        "VXR_V03",
        "VXR_V03",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("PID", "Patient Identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 0, 1),
            ("NK1", "Next of Kin / Associated Parties", 0, -1),
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
                    ("IN3", "Insurance Additional Information, Certification", 0, 1),
                ),
            ),
            (
                "ORDER",
                "Order",
                0,
                -1,
                (
                    ("ORC", "Common Order", 0, 1),
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
    "VXU_V04": (
        "VXU_V04",
        "VXU_V04",
        (
            ("MSH", "Message Header", 1, 1),
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
                    ("ORC", "Common Order", 0, 1),
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
    "VXX_V02": (
        "VXX_V02",
        "VXX_V02",
        (
            ("MSH", "Message Header", 1, 1),
            ("MSA", "Message Acknowledgment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient Identification", 1, 1),
                    ("NK1", "Next of Kin / Associated Parties", 0, -1),
                ),
            ),
        ),
    ),
}
