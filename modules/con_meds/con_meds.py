from core.types import Block

id = "con_meds"
title = "Concomitant Medications"
repeatable = True

blocks = [
    Block.para("Any new or changed medications since last visit? Yes ☐  No ☐"),
    Block.repeat("Medication", [
        "Name ______________  Dose ____  Unit ____  Route ____  Frequency ____",
        "Indication ______________  Start ____-___-____  Stop ____-___-____  Ongoing ☐",
    ]),
    Block.signature("Reviewed by"),
]
