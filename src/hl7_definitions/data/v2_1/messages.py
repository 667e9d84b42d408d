# src/hl7_definitions/data/v2_1/messages.py
"""HL7 v2.1 message structures."""

MESSAGES = {
    "ACK": (
        "ACK",
        "General acknowledgment",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
        ),
    ),
    "ADR_A19": (
        "ADR_A19",
        "ADR_A19",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    ("EVN", "Event type", 0, 1),
                    ("PID", "Patient identification", 1, 1),
                    ("PV1", "Patient visit", 1, 1),
                ),
            ),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "ADT_A01": (
        "ADT_A01",
        "Admit a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A02": (
        "ADT_A02",
        "Transfer a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A03": (
        "ADT_A03",
        "Discharge a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
        ),
    ),
    "ADT_A04": (
        "ADT_A04",
        "Register a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A05": (
        "ADT_A05",
        "Pre-admit a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A06": (
        "ADT_A06",
        "Change an outpatient to an inpatient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A07": (
        "ADT_A07",
        "Change an inpatient to an outpatient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A08": (
        "ADT_A08",
        "Update patient information",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A09": (
        "ADT_A09",
        "Patient departing - tracking",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A10": (
        "ADT_A10",
        "Patient arriving - tracking",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A11": (
        "ADT_A11",
        "Cancel admit/visit notification",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A12": (
        "ADT_A12",
        "Cancel transfer",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A13": (
        "ADT_A13",
        "Cancel discharge/end visit",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A14": (
        "ADT_A14",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PD1", "Patient Additional Demographic", 1, 1),
            ("NK1", "Next of kin", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A15": (
        "ADT_A15",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A16": (
        "ADT_A16",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("DG1", "Diagnosis", 0, 1),
        ),
    ),
    "ADT_A17": (
        "ADT_A17",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient identification", 1, 1),
                    ("PV1", "Patient visit", 1, 1),
                ),
            ),
        ),
    ),
    "ADT_A18": (
        "ADT_A18",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 1, 1),
            ("PV1", "Patient visit", 0, 1),
        ),
    ),
    "ADT_A20": (
        "ADT_A20",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("NPU", "Bed Status Update", 1, 1),
        ),
    ),
    "ADT_A21": (
        "ADT_A21",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A22": (
        "ADT_A22",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A23": (
        "ADT_A23",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
        ),
    ),
    "ADT_A24": (
        "ADT_A24",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PID", "Patient identification", 1, 1),
        ),
    ),
    "BAR_P01": (
        "BAR_P01",
        "BAR_P01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            (
                "VISIT",
                "Visit",
                1,
                -1,
                (
                    ("PV1", "Patient visit", 0, 1),
                    ("DG1", "Diagnosis", 0, -1),
                    ("PR1", "Procedures", 0, -1),
                    ("GT1", "Guarantor", 0, -1),
                    ("NK1", "Next of kin", 0, -1),
                    ("IN1", "Insurance", 0, -1),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P02": (
        "BAR_P02",
        "BAR_P02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            (
                "PATIENT",
                "Patient",
                1,
                -1,
                (
                    ("PID", "Patient identification", 1, 1),
                    ("PV1", "Patient visit", 0, 1),
                ),
            ),
        ),
    ),
    "DFT_P03": (
        "DFT_P03",
        "DFT_P03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
            ("FT1", "Financial Transaction", 0, -1),
        ),
    ),
    "DSR_Q01": (
        "DSR_Q01",
        "DSR_Q01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 1, 1),
        ),
    ),
    "DSR_Q03": (
        "DSR_Q03",
        "DSR_Q03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MCF_Q02": (
        "MCF_Q02",
        "MCF_Q02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
        ),
    ),
    "ORM_O01": (
        "ORM_O01",
        "Order message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("NTE", "Notes and comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient identification", 1, 1),
                    ("NTE", "Notes and comments", 0, -1),
                    ("PV1", "Patient visit", 0, 1),
                ),
            ),
            (
                "ORDER",
                "Order",
                1,
                -1,
                (
                    ("ORC", "Common order", 1, 1),
                    (
                        "ORDER_DETAIL",
                        "Order Detail",
                        0,
                        1,
                        (
                            ("OBR", "Observation request", 1, 1),
                            ("ORO", "Order Other", 1, 1),
                            ("RX1", "Pharmacy Order", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                            ("OBX", "Observation / result", 0, -1),
                            ("NTE", "Notes and comments", 0, -1),
                        ),
                    ),
                    ("BLG", "Billing", 0, 1),
                ),
            ),
        ),
    ),
    "ORR_O02": (
        "ORR_O02",
        "ORR_O02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("NTE", "Notes and comments", 0, -1),
            (
                "PATIENT",
                "Patient",
                0,
                1,
                (
                    ("PID", "Patient identification", 0, 1),
                    ("NTE", "Notes and comments", 0, -1),
                    (
                        "ORDER",
                        "Order",
                        1,
                        -1,
                        (
                            ("ORC", "Common order", 1, 1),
                            (
                                "ORDER_DETAIL",
                                "Order Detail",
                                0,
                                1,
                                (
                                    ("OBR", "Observation request", 1, 1),
                                    ("ORO", "Order Other", 1, 1),
                                    ("RX1", "Pharmacy Order", 1, 1),
                                ),
                            ),
                            ("NTE", "Notes and comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "ORU_R01": (
        "ORU_R01",
        "Unsolicited transmission of an observation",
        (
            ("MSH", "Message header segment", 1, 1),
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
                            ("PID", "Patient identification", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                            ("PV1", "Patient visit", 0, 1),
                        ),
                    ),
                    (
                        "ORDER_OBSERVATION",
                        "Order Observation",
                        1,
                        -1,
                        (
                            ("ORC", "Common order", 0, 1),
                            ("OBR", "Observation request", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation / result", 0, 1),
                                    ("NTE", "Notes and comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "ORU_R03": (
        "ORU_R03",
        "Observational results (unsolicited)",
        (
            ("MSH", "Message header segment", 1, 1),
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
                            ("PID", "Patient identification", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                            ("PV1", "Patient visit", 0, 1),
                        ),
                    ),
                    (
                        "ORDER_OBSERVATION",
                        "Order Observation",
                        1,
                        -1,
                        (
                            ("ORC", "Common order", 0, 1),
                            ("OBR", "Observation request", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                            (
                                "OBSERVATION",
                                "Observation",
                                1,
                                -1,
                                (
                                    ("OBX", "Observation / result", 0, 1),
                                    ("NTE", "Notes and comments", 0, -1),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "QRY_A19": (
        "QRY_A19",
        "Query",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
        ),
    ),
    "QRY_Q01": (
        "QRY_Q01",
        "Query",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 1, 1),
        ),
    ),
    "QRY_Q02": (
        "QRY_Q02",
        "Query",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 1, 1),
        ),
    ),
    "UDM_Q05": (
        "UDM_Q05",
        "UDM_Q05",
        (
            ("MSH", "Message header segment", 1, 1),
            ("URD", "Results/Update Definition", 1, 1),
            ("URS", "Unsolicited Selection", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 1, 1),
        ),
    ),
}
