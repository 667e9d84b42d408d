# src/hl7_definitions/data/v2_2/messages.py
"""HL7 v2.2 message structures."""

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
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    ("EVN", "Event type", 0, 1),
                    ("PID", "Patient identification", 1, 1),
                    ("NK1", "Next of kin", 0, -1),
                    ("PV1", "Patient visit", 1, 1),
                    ("PV2", "Patient visit - additional information", 0, 1),
                    ("OBX", "Observation / result", 0, -1),
                    ("AL1", "Patient allergy information", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                    ("PR1", "Procedures", 0, -1),
                    ("GT1", "Guarantor", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance additional information", 0, 1),
                            (
                                "IN3",
                                "Insurance additional information, certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82 data", 0, 1),
                    ("UB2", "UB92 data", 0, 1),
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
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A03": (
        "ADT_A03",
        "Discharge a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A04": (
        "ADT_A04",
        "Register a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A05": (
        "ADT_A05",
        "Pre-admit a patient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A06": (
        "ADT_A06",
        "Change an outpatient to an inpatient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 0, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A07": (
        "ADT_A07",
        "Change an inpatient to an outpatient",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 0, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A08": (
        "ADT_A08",
        "Update patient information",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
        ),
    ),
    "ADT_A13": (
        "ADT_A13",
        "Cancel discharge/end visit",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A14": (
        "ADT_A14",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
        ),
    ),
    "ADT_A17": (
        "ADT_A17",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A18": (
        "ADT_A18",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 0, 1),
            ("PV1", "Patient visit", 1, 1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
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
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A24": (
        "ADT_A24",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
        ),
    ),
    "ADT_A25": (
        "ADT_A25",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A26": (
        "ADT_A26",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A27": (
        "ADT_A27",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A28": (
        "ADT_A28",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A29": (
        "ADT_A29",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A30": (
        "ADT_A30",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 1, 1),
        ),
    ),
    "ADT_A31": (
        "ADT_A31",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("NK1", "Next of kin", 0, -1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("AL1", "Patient allergy information", 0, -1),
            ("DG1", "Diagnosis", 0, -1),
            ("PR1", "Procedures", 0, -1),
            ("GT1", "Guarantor", 0, -1),
            (
                "INSURANCE",
                "Insurance",
                0,
                -1,
                (
                    ("IN1", "Insurance", 1, 1),
                    ("IN2", "Insurance additional information", 0, 1),
                    ("IN3", "Insurance additional information, certification", 0, 1),
                ),
            ),
            ("ACC", "Accident", 0, 1),
            ("UB1", "UB82 data", 0, 1),
            ("UB2", "UB92 data", 0, 1),
        ),
    ),
    "ADT_A32": (
        "ADT_A32",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A33": (
        "ADT_A33",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 1, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
        ),
    ),
    "ADT_A34": (
        "ADT_A34",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 1, 1),
        ),
    ),
    "ADT_A35": (
        "ADT_A35",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 1, 1),
        ),
    ),
    "ADT_A36": (
        "ADT_A36",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("MRG", "Merge Patient Information", 1, 1),
        ),
    ),
    "ADT_A37": (
        "ADT_A37",
        "ADT message",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
        ),
    ),
    "BAR_P01": (
        "BAR_P01",
        "Add/change billing account",
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
                    ("PV2", "Patient visit - additional information", 0, 1),
                    ("OBX", "Observation / result", 0, -1),
                    ("AL1", "Patient allergy information", 0, -1),
                    ("DG1", "Diagnosis", 0, -1),
                    ("PR1", "Procedures", 0, -1),
                    ("GT1", "Guarantor", 0, -1),
                    ("NK1", "Next of kin", 0, -1),
                    (
                        "INSURANCE",
                        "Insurance",
                        0,
                        -1,
                        (
                            ("IN1", "Insurance", 1, 1),
                            ("IN2", "Insurance additional information", 0, 1),
                            (
                                "IN3",
                                "Insurance additional information, certification",
                                0,
                                1,
                            ),
                        ),
                    ),
                    ("ACC", "Accident", 0, 1),
                    ("UB1", "UB82 data", 0, 1),
                    ("UB2", "UB92 data", 0, 1),
                ),
            ),
        ),
    ),
    "BAR_P02": (
        "BAR_P02",
        "Add/change billing account",
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
        "Detail financial transactions",
        (
            ("MSH", "Message header segment", 1, 1),
            ("EVN", "Event type", 1, 1),
            ("PID", "Patient identification", 1, 1),
            ("PV1", "Patient visit", 0, 1),
            ("PV2", "Patient visit - additional information", 0, 1),
            ("OBX", "Observation / result", 0, -1),
            ("FT1", "Financial Transaction", 1, -1),
        ),
    ),
    "DSR_P04": (
        "DSR_P04",
        "DSR_P04",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "DSR_Q01": (
        "DSR_Q01",
        "DSR_Q01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "DSR_Q03": (
        "DSR_Q03",
        "DSR_Q03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "DSR_R03": (
        "DSR_R03",
        "DSR_R03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSP", "Display Data", 1, -1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFD_M01": (
        "MFD_M01",
        "MFD_M01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFD_M02": (
        "MFD_M02",
        "MFD_M02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFD_M03": (
        "MFD_M03",
        "MFD_M03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFK_M01": (
        "MFK_M01",
        "MFK_M01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFK_M02": (
        "MFK_M02",
        "MFK_M02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFK_M03": (
        "MFK_M03",
        "MFK_M03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MFA", "Master File Acknowledgment", 0, -1),
        ),
    ),
    "MFN_M01": (
        "MFN_M01",
        "MFN_M01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF", "Mf", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
        ),
    ),
    "MFN_M02": (
        "MFN_M02",
        "MFN_M02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF_STAFF", "Mf Staff", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
        ),
    ),
    "MFN_M03": (
        "MFN_M03",
        "MFN_M03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF_TEST", "Mf Test", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
        ),
    ),
    "MFQ_M01": (
        "MFQ_M01",
        "MFQ_M01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFQ_M02": (
        "MFQ_M02",
        "MFQ_M02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFQ_M03": (
        "MFQ_M03",
        "MFQ_M03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFR_M01": (
        "MFR_M01",
        "MFR_M01",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF", "Mf", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFR_M02": (
        "MFR_M02",
        "MFR_M02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF_STAFF", "Mf Staff", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "MFR_M03": (
        "MFR_M03",
        "MFR_M03",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("MFI", "Master File Identification", 1, 1),
            ("MF_TEST", "Mf Test", 1, -1, (("MFE", "Master File Entry", 1, 1),)),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "NMD_N01": (
        "NMD_N01",
        "NMD_N01",
        (
            ("MSH", "Message header segment", 1, 1),
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
                            ("NTE", "Notes and comments", 0, -1),
                        ),
                    ),
                    (
                        "APP_STATS",
                        "App Stats",
                        0,
                        1,
                        (
                            ("NST", "Application Control Level Statistics", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                        ),
                    ),
                    (
                        "APP_STATUS",
                        "App Status",
                        0,
                        1,
                        (
                            ("NSC", "Application Status Change", 1, 1),
                            ("NTE", "Notes and comments", 0, -1),
                        ),
                    ),
                ),
            ),
        ),
    ),
    "NMQ_N02": (
        "NMQ_N02",
        "NMQ_N02",
        (
            ("MSH", "Message header segment", 1, 1),
            (
                "QRY_WITH_DETAIL",
                "Qry With Detail",
                0,
                1,
                (
                    ("QRD", "Original-Style Query Definition", 1, 1),
                    ("QRF", "Original Style Query Filter", 0, 1),
                ),
            ),
            (
                "CLOCK_AND_STATISTICS",
                "Clock And Statistics",
                1,
                -1,
                (
                    ("NCK", "System Clock", 0, 1),
                    ("NST", "Application Control Level Statistics", 0, 1),
                    ("NSC", "Application Status Change", 0, 1),
                ),
            ),
        ),
    ),
    "NMR_N02": (
        "NMR_N02",
        "NMR_N02",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            ("ERR", "Error", 0, 1),
            ("QRD", "Original-Style Query Definition", 0, 1),
            (
                "CLOCK_AND_STATS_WITH_NOTES_ALT",
                "Clock And Stats With Notes Alt",
                1,
                -1,
                (
                    ("NCK", "System Clock", 0, 1),
                    ("NTE", "Notes and comments", 0, -1),
                    ("NST", "Application Control Level Statistics", 0, 1),
                    ("NTE", "Notes and comments", 0, -1),
                    ("NSC", "Application Status Change", 0, 1),
                    ("NTE", "Notes and comments", 0, -1),
                ),
            ),
        ),
    ),
    "ORF_R04": (
        "ORF_R04",
        "ORF_R04",
        (
            ("MSH", "Message header segment", 1, 1),
            ("MSA", "Message acknowledgement", 1, 1),
            (
                "QUERY_RESPONSE",
                "Query Response",
                1,
                -1,
                (
                    ("QRD", "Original-Style Query Definition", 1, 1),
                    ("QRF", "Original Style Query Filter", 0, 1),
                    ("PID", "Patient identification", 0, 1),
                    ("NTE", "Notes and comments", 0, -1),
                ),
            ),
            (
                "ORDER",
                "Order",
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
            ("DSC", "Continuation pointer", 0, 1),
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
                            (
                                "CHOICE",
                                "Choice",
                                1,
                                1,
                                (
                                    ("OBR", "Observation request", 1, 1),
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
                                    ("OBR", "Observation request", 1, 1),
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
                            ("NTE", "Notes and comments", 0, -1),
                            ("OBX", "Observation / result", 0, -1),
                            ("NTE", "Notes and comments", 1, -1),
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
                                    (
                                        "CHOICE",
                                        "Choice",
                                        1,
                                        1,
                                        (
                                            ("OBR", "Observation request", 1, 1),
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
                                            ("OBR", "Observation request", 1, 1),
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
    "QRY_A19": (
        "QRY_A19",
        "Query, original mode",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
        ),
    ),
    "QRY_P04": (
        "QRY_P04",
        "Query, original mode",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "QRY_Q01": (
        "QRY_Q01",
        "Query, original mode",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "QRY_Q02": (
        "QRY_Q02",
        "Query, original mode",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 0, 1),
            ("DSC", "Continuation pointer", 0, 1),
        ),
    ),
    "QRY_R02": (
        "QRY_R02",
        "Query, original mode",
        (
            ("MSH", "Message header segment", 1, 1),
            ("QRD", "Original-Style Query Definition", 1, 1),
            ("QRF", "Original Style Query Filter", 1, 1),
            ("DSC", "Continuation pointer", 0, 1),
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
