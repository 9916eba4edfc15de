from core.types import Block

id = "ecg"
title = "ECG (with Repeat / N/A option)"
repeatable = True

blocks = [
    Block.para("12-lead ECG per protocol. Record times & any repeats."),
    Block.field("machine", "ECG machine / ID"),
    Block.repeat("ECG", [
        "Date ____-___-____  Time ____:____  QTc ___ ms  Rhythm ____.  Repeat? Yes ☐  No ☐  N/A ☐",
    ]),
    Block.pi(),
    Block.signature("Investigator"),
]
