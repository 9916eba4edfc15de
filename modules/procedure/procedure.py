from core.types import Block

id = "procedure"
title = "Procedure / Intervention"

blocks = [
    Block.grid(["Procedure Type", "Location", "Date/Time", "Operator"], rows=2),
    Block.bullet("Pre-procedure checks (consent/fasting/allergies) | Sedation ☐  No sedation ☐"),
    Block.bullet("Samples collected (type/volume/labels) | Complications (describe, if any)"),
    Block.pi(),
    Block.signature("Investigator"),
]
